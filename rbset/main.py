import getopt
import os
import sys

import rbset
from . import log
from . import vis
from .exception import RBSetError, ParseError, FileParseError
from .tree.rbtree import RBTree
from .tree.verify import verify
from .util import parse_key, key_to_str, KEY_TYPES


def default_options():
    opts = {
            'key_type' : 'int',
            'delete' : [],
            'check' : False,
            'show' : False,
            'minmax' : False,
            'verbosity' : log.LOG_WARN,
            'color' : 'auto',
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def read_keys(f, filename, key_type):
    """Yields the keys read from the file object f, one per line.

    Blank lines and lines starting with '#' are skipped."""
    for lineno, line in enumerate(f, start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        try:
            yield parse_key(line, key_type)
        except ParseError as e:
            raise FileParseError(filename, lineno, e)

def _checked(tree, options, what, key):
    if not options['check']:
        return
    try:
        bh = verify(tree)
    except RBSetError as e:
        log.fatal("invariant violated after ", what, " ", key_to_str(key),
                  ": ", e)
    log.debug2("check after ", what, " ", key_to_str(key),
               ": black-height ", bh)

def build_tree(keys, options):
    tree = RBTree()
    for k in keys:
        tree.insert(k)
        _checked(tree, options, "inserting", k)
    log.debug1("inserted ", tree.size(), " keys, height ", tree.height())
    return tree

def delete_keys(tree, keys, options):
    for k in keys:
        if tree.erase_key(k):
            _checked(tree, options, "erasing", k)
        else:
            log.warn("key ", key_to_str(k), " not found, nothing erased")

def write_minmax(tree, out):
    if tree.is_empty():
        log.warn("tree is empty, no minimum or maximum")
        return
    out.write("min: {0:s}\n".format(key_to_str(tree.minimum().key)))
    out.write("max: {0:s}\n".format(key_to_str(tree.maximum().key)))

def rbset_main(argv):
    log.logger = log.Logger()
    (options, filename) = parse_arguments(argv)
    log.logger = log.Logger(loglevel=options['verbosity'],
                            colors=options['color'])

    f = None
    tree = None
    try:
        try:
            if filename is None or filename == '-':
                filename = '<stdin>'
                f = sys.stdin
            else:
                f = open(filename, 'r')
            keys = list(read_keys(f, filename, options['key_type']))
        except IOError as e:
            log.fatal("unable to read input file: \n", str(e))
        finally:
            if f is not None and f is not sys.stdin:
                f.close()
        log.info("read ", len(keys), " keys from ", filename)

        deletions = [parse_key(k, options['key_type'])
                     for k in options['delete']]
        tree = build_tree(keys, options)
        delete_keys(tree, deletions, options)

        if options['show']:
            sys.stdout.write(vis.format_tree(tree, log.logger.colors) + "\n")
        if options['minmax']:
            write_minmax(tree, sys.stdout)
        for k in tree.to_list():
            sys.stdout.write(key_to_str(k) + "\n")
    except RBSetError as e:
        log.fatal(e)
    finally:
        if tree is not None and not tree.destroyed:
            tree.destroy()
    return 0

def parse_arguments(argv):
    long_opts = [
            'check',
            'color=',
            'delete=',
            'help',
            'minmax',
            'quiet',
            'show',
            'type=',
            'verbose',
            'version'
    ]
    options = default_options()
    opts = 'cd:hmqst:v'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        elif opt in ('-c', '--check'):
            options['check'] = True

        elif opt in ('-d', '--delete'):
            options['delete'].append(arg)

        elif opt in ('-m', '--minmax'):
            options['minmax'] = True

        elif opt in ('-s', '--show'):
            options['show'] = True

        elif opt in ('-t', '--type'):
            if arg not in KEY_TYPES:
                invalid_argument(opt, arg)
            options['key_type'] = arg

        elif opt in ('-q', '--quiet'):
            options['verbosity'] = log.LOG_ERROR

        elif opt in ('-v', '--verbose'):
            options['verbosity'] += 1

        elif opt in ('--color',):
            if arg not in ('auto', 'always', 'never'):
                invalid_argument(opt, arg)
            options['color'] = arg

    if len(args) > 1:
        log.fatal_exit(2, 'too many arguments', "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")
    filename = args[0] if args else None

    return (options, filename)

def version():
    sys.stdout.write("rbset " + rbset.__version__ + "\n")


def usage(program_name):
    def_opts = default_options()
    sys.stdout.write(
            'Usage: {0:s} [option]... [FILE]'
            .format(program_name))
    sys.stdout.write(
'''
Insert the keys listed in FILE (or standard input, one per line) into a
red-black tree and print them in sorted order

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
  -q, --quiet                only report errors
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Tree:
  -t, --type=TYPE            key type: 'int', 'float' or 'str'
                               (default {key_type:s})
  -d, --delete=KEY           erase one occurrence of KEY after all keys are
                               inserted (may be given several times)
  -c, --check                verify the red-black invariants after every
                               insertion and erasure
  -s, --show                 draw the tree before listing its keys
  -m, --minmax               print the smallest and largest key
'''.format(key_type=def_opts['key_type'])
    )

def main():
    try:
        sys.exit(rbset_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
