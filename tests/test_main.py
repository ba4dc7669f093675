import io
import sys

import pytest

import rbset
from rbset import log
from rbset.main import rbset_main, parse_arguments, read_keys
from rbset.exception import FileParseError


@pytest.fixture(autouse=True)
def _restore_logger(monkeypatch):
    # rbset_main installs its own logger
    monkeypatch.setattr(log, "logger", log.logger)


@pytest.fixture
def keyfile(tmp_path):
    path = tmp_path / "keys.txt"
    path.write_text("# some keys\n30\n10\n\n20\n10\n")
    return path


def test_prints_sorted_keys(keyfile, capsys):
    assert rbset_main(["rbset", str(keyfile)]) == 0
    out = capsys.readouterr().out
    assert out == "10\n10\n20\n30\n"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1\n2\n"))
    assert rbset_main(["rbset"]) == 0
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_delete_check_and_minmax(keyfile, capsys):
    argv = ["rbset", "-c", "-m", "-d", "10", "--delete=30", str(keyfile)]
    assert rbset_main(argv) == 0
    out = capsys.readouterr().out
    assert out == "min: 10\nmax: 20\n10\n20\n"


def test_missing_delete_key_warns(keyfile, capsys):
    assert rbset_main(["rbset", "-d", "99", str(keyfile)]) == 0
    captured = capsys.readouterr()
    assert "warning: key 99 not found" in captured.err
    assert captured.out == "10\n10\n20\n30\n"


def test_show_draws_tree(tmp_path, capsys):
    path = tmp_path / "keys.txt"
    path.write_text("10\n20\n30\n")
    assert rbset_main(["rbset", "--color=never", "-s", str(path)]) == 0
    out = capsys.readouterr().out
    assert out == "20 (B)\n├── 10 (R)\n└── 30 (R)\n10\n20\n30\n"


def test_string_keys(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("pear\napple\nfig\n")
    assert rbset_main(["rbset", "--type=str", str(path)]) == 0
    assert capsys.readouterr().out == "apple\nfig\npear\n"


def test_minmax_on_empty_input_warns(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert rbset_main(["rbset", "-m", str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "tree is empty" in captured.err


def test_parse_error_is_fatal(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("1\nabc\n")
    with pytest.raises(SystemExit) as excinfo:
        rbset_main(["rbset", str(path)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert str(path) + ":2: invalid int key `abc'" in err


def test_bad_delete_key_is_fatal(keyfile, capsys):
    with pytest.raises(SystemExit) as excinfo:
        rbset_main(["rbset", "-d", "x", str(keyfile)])
    assert excinfo.value.code == 1


def test_missing_file_is_fatal(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        rbset_main(["rbset", str(tmp_path / "nope.txt")])
    assert excinfo.value.code == 1
    assert "unable to read input file" in capsys.readouterr().err


def test_unknown_option_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        rbset_main(["rbset", "--frobnicate"])
    assert excinfo.value.code == 2


def test_invalid_type_argument(capsys):
    log.logger = log.Logger()
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(["rbset", "--type=complex"])
    assert excinfo.value.code == 2
    assert "invalid --type argument `complex'" in capsys.readouterr().err


def test_verbose_and_quiet_levels():
    options, filename = parse_arguments(["rbset", "-vv", "keys"])
    assert options['verbosity'] == log.LOG_WARN + 2
    assert filename == "keys"

    options, filename = parse_arguments(["rbset", "-q"])
    assert options['verbosity'] == log.LOG_ERROR
    assert filename is None


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(["rbset", "--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "rbset " + rbset.__version__ + "\n"


def test_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(["rbset", "--help"])
    assert excinfo.value.code == 0
    assert "Usage: rbset" in capsys.readouterr().out


def test_read_keys_reports_line_numbers():
    lines = io.StringIO("1\n\n# c\n2.5\n")
    with pytest.raises(FileParseError) as excinfo:
        list(read_keys(lines, "input", "int"))
    assert excinfo.value.line == 4
    assert list(read_keys(io.StringIO("1\n2.5\n"), "input", "float")) == [1.0, 2.5]
