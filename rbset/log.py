import sys
import os

LOG_FATAL = -2
LOG_ERROR = -1
LOG_WARN = 0
LOG_INFO = 1
LOG_DEBUG1 = 2
LOG_DEBUG2 = 3
LOG_DEBUG3 = 4

def fatal_exit(exitcode, *msg):
    logger.do_log(LOG_FATAL, os.path.basename(sys.argv[0]), ": fatal: ", *msg)
    sys.exit(exitcode)

def fatal(*msg):
    fatal_exit(1, *msg)

def warn(*msg):
    logger.do_log(LOG_WARN, "warning: ", *msg)

def error(*msg):
    logger.do_log(LOG_ERROR, "error: ", *msg)

def info(*msg):
    logger.do_log(LOG_INFO, *msg)

def debug1(*msg):
    logger.do_log(LOG_DEBUG1, *msg)

def debug2(*msg):
    logger.do_log(LOG_DEBUG2, *msg)

def debug3(*msg):
    logger.do_log(LOG_DEBUG3, *msg)


class Logger(object):
    def __init__(self, loglevel=LOG_WARN, logfile=None, colors='auto'):
        self.loglevel = loglevel
        self._file = logfile if logfile is not None else sys.stderr
        self.set_colors(colors)

    def set_colors(self, preference):
        if preference == 'always':
            colors = Colors()
        elif preference == 'auto':
            if self._file.isatty():
                colors = Colors()
            else:
                colors = NoColors()
        elif preference == 'never':
            colors = NoColors()
        else:
            raise ValueError("invalid color preference: " + str(preference))
        self.colors = ColorSchemeDefault(colors)
        self._make_colormap()

    def _make_colormap(self):
        self._colormap = {
                LOG_WARN  : self.colors.WARN,
                LOG_ERROR : self.colors.ERROR,
                LOG_FATAL : self.colors.ERROR,
                LOG_DEBUG1: self.colors.DEBUG1,
                LOG_DEBUG2: self.colors.DEBUG2,
                LOG_DEBUG3: self.colors.DEBUG3
            }

    def enabled_for(self, level):
        return level <= self.loglevel or level <= LOG_FATAL

    def _write_log(self, msg):
        self._file.write(msg)

    def _colorize_msg(self, level, *msg):
        try:
            return self.colors.wrap_list(self._colormap[level], list(msg))
        except KeyError:
            return msg

    def _compile_msg(self, *msg):
        l = list(map(str, msg))
        l.append("\n")
        return ''.join(l)

    def do_log(self, level, *msg):
        if not self.enabled_for(level):
            return
        msg = self._colorize_msg(level, *msg)
        msg = self._compile_msg(*msg)
        self._write_log(msg)


class NoColors:
    RESET          = ''
    RED            = ''
    CYAN           = ''
    BRIGHT_RED     = ''
    BRIGHT_YELLOW  = ''
    BRIGHT_CYAN    = ''

    def wrap(self, color, s):
        return s

    def wrap_list(self, color, l):
        return l

class Colors(NoColors):
    RESET          = '\033[0m'
    RED            = '\033[31m'
    CYAN           = '\033[36m'
    BRIGHT_RED     = '\033[1;31m'
    BRIGHT_YELLOW  = '\033[1;33m'
    BRIGHT_CYAN    = '\033[1;36m'

    def wrap(self, color, s):
        return ''.join((color, s, self.RESET))

    def wrap_list(self, color, l):
        l.insert(0, color)
        l.append(self.RESET)
        return l

class ColorSchemeDefault:
    def __init__(self, colors):
        if colors is None:
            colors = Colors()
        self.WARN = colors.BRIGHT_YELLOW
        self.ERROR = colors.BRIGHT_RED
        self.DEBUG1 = colors.CYAN
        self.DEBUG2 = colors.CYAN
        self.DEBUG3 = colors.CYAN
        # node colors used by the tree renderer
        self.RED_NODE = colors.RED
        self.BLACK_NODE = ''
        self.DECO = colors.BRIGHT_CYAN

        self.RESET = colors.RESET
        self.colors = colors

    def wrap(self, color, s):
        return self.colors.wrap(color, s)

    def wrap_list(self, color, l):
        return self.colors.wrap_list(color, l)


logger = Logger()
