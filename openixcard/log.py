"""Coloured console messages."""

import sys

_GREEN = "\x1b[32m"
_CYAN = "\x1b[36m"
_WHITE = "\x1b[37m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def _emit(colour, prefix, msg):
    sys.stdout.write(f"{colour}{prefix}{msg}{_RESET}\n")
    sys.stdout.flush()


def data(msg):
    """Print plain data in green."""
    _emit(_GREEN, "", msg)


def info(msg):
    """Print an informational message."""
    _emit(_CYAN, "[OpenixCard INFO] ", msg)


def debug(msg):
    """Print a debug message."""
    _emit(_WHITE, "[OpenixCard DEBUG] ", msg)


def warning(msg):
    """Print a warning."""
    _emit(_YELLOW, "[OpenixCard WARNING] ", msg)


def error(msg):
    """Print an error."""
    _emit(_RED, "[OpenixCard ERROR] ", msg)