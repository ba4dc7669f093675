import io

import pytest

from rbset import log


class TTYStringIO(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def buf(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(log, "logger", log.Logger(log.LOG_WARN, out, 'never'))
    return out


def test_messages_above_level_are_dropped(buf):
    log.info("hidden")
    log.debug3("hidden too")
    log.warn("shown ", 1)
    assert buf.getvalue() == "warning: shown 1\n"


def test_verbose_level_lets_debug_through(buf):
    log.logger.loglevel = log.LOG_DEBUG2
    log.debug2("released ", 3, " nodes")
    log.debug3("not this one")
    assert buf.getvalue() == "released 3 nodes\n"


def test_error_prefix(buf):
    log.error("bad")
    assert buf.getvalue() == "error: bad\n"


def test_fatal_exit_always_logs(buf):
    log.logger.loglevel = log.LOG_FATAL
    with pytest.raises(SystemExit) as excinfo:
        log.fatal_exit(2, "broken")
    assert excinfo.value.code == 2
    assert ": fatal: broken" in buf.getvalue()


def test_colors_always():
    out = io.StringIO()
    logger = log.Logger(log.LOG_WARN, out, 'always')
    logger.do_log(log.LOG_WARN, "careful")
    assert out.getvalue() == log.Colors.BRIGHT_YELLOW + "careful" + log.Colors.RESET + "\n"


def test_colors_auto_follows_tty():
    plain = io.StringIO()
    log.Logger(log.LOG_WARN, plain, 'auto').do_log(log.LOG_ERROR, "x")
    assert plain.getvalue() == "x\n"

    tty = TTYStringIO()
    log.Logger(log.LOG_WARN, tty, 'auto').do_log(log.LOG_ERROR, "x")
    assert tty.getvalue() == log.Colors.BRIGHT_RED + "x" + log.Colors.RESET + "\n"


def test_invalid_color_preference():
    with pytest.raises(ValueError):
        log.Logger(log.LOG_WARN, io.StringIO(), 'sometimes')


def test_tree_logs_teardown_at_debug2(buf):
    from rbset import RBTree

    log.logger.loglevel = log.LOG_DEBUG2
    RBTree([1, 2, 3]).clear()
    assert "released 3 nodes" in buf.getvalue()
