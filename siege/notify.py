"""Error notification on the terminal and through the system log."""

from __future__ import annotations

import errno as _errno
import logging
import os
import sys
from enum import IntEnum

try:
    import syslog as _syslog
except ImportError:  # pragma: no cover - platforms without syslog
    _syslog = None

__all__ = [
    "Level",
    "Color",
    "FatalError",
    "open_log",
    "close_log",
    "notify",
    "syslog_message",
    "display",
]

_ESC = "\x1b"
_RESET = 0
_BRIGHT = 1

# Numeric syslog priorities.
_LOG_CRIT = 2
_LOG_ERR = 3
_LOG_WARNING = 4


class Level(IntEnum):
    """Severity of a notification."""

    DEBUG = 0
    WARNING = 1
    ERROR = 2
    FATAL = 3


class Color(IntEnum):
    """Terminal colours; UNCOLOR means plain output."""

    UNCOLOR = -1
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class FatalError(SystemExit):
    """Raised after a FATAL notification; exits with status 1 if uncaught."""

    def __init__(self, message: str) -> None:
        super().__init__(1)
        self.message = message

    def __str__(self) -> str:
        return self.message


# label shown on the terminal, its colour, and the label written to syslog
_MODES = {
    Level.DEBUG: ("debug", Color.BLUE, "[debug]"),
    Level.WARNING: ("alert", Color.GREEN, "[alert] "),
    Level.ERROR: ("error", Color.YELLOW, "[error]"),
    Level.FATAL: ("fatal", Color.RED, "[fatal]"),
}

_PRIORITIES = {
    Level.DEBUG: _LOG_WARNING,
    Level.WARNING: _LOG_WARNING,
    Level.ERROR: _LOG_ERR,
    Level.FATAL: _LOG_CRIT,
}

_LOGGING_LEVELS = {
    _LOG_WARNING: logging.WARNING,
    _LOG_ERR: logging.ERROR,
    _LOG_CRIT: logging.CRITICAL,
}

_log_state = {"ident": "siege"}


def open_log(program: str) -> None:
    """Open the system log under the given program name."""
    _log_state["ident"] = program
    if _syslog is not None:
        _syslog.openlog(program, _syslog.LOG_PID, _syslog.LOG_DAEMON)


def close_log() -> None:
    """Close the system log."""
    if _syslog is not None:
        _syslog.closelog()


def _compose(level: Level, fmt: str, args: tuple) -> str:
    """Format the message, appending the text of an OSError being handled."""
    text = fmt % args if args else fmt
    exc = sys.exc_info()[1]
    code = exc.errno if isinstance(exc, OSError) else None
    if level is Level.DEBUG or not code or code == _errno.ENOSYS:
        return f"{text}\n"
    return f"{text}: {os.strerror(code)}\n"


def syslog_message(level: Level | int, fmt: str, *args: object) -> str:
    """Send a message to the system log and return the logged line.

    A FATAL message raises FatalError after it is logged.
    """
    level = Level(level)
    msg = _compose(level, fmt, args)
    line = f"{_MODES[level][2]} {msg}"
    priority = _PRIORITIES[level]
    if _syslog is not None:
        _syslog.syslog(priority, line)
    else:  # pragma: no cover - platforms without syslog
        logging.getLogger(_log_state["ident"]).log(_LOGGING_LEVELS[priority], line.rstrip("\n"))
    if level is Level.FATAL:
        raise FatalError(msg.rstrip("\n"))
    return line


def notify(level: Level | int, fmt: str, *args: object) -> str:
    """Write a coloured message to standard error and return it.

    A FATAL message raises FatalError after it is written.
    """
    level = Level(level)
    msg = _compose(level, fmt, args)
    label, color, _ = _MODES[level]
    prefix = f"[{_ESC}[{_BRIGHT};{int(color) + 30}m{label}{_ESC}[{_RESET}m]"
    line = f"{prefix} {msg}"
    sys.stdout.flush()
    sys.stderr.write(line)
    if level is Level.FATAL:
        raise FatalError(msg.rstrip("\n"))
    return line


def display(color: Color | int, fmt: str, *args: object) -> str:
    """Write a message to standard output in the given colour and return it."""
    text = fmt % args if args else fmt
    color = int(color)
    if color == Color.UNCOLOR:
        msg = f"{text}\n"
    else:
        msg = f"{_ESC}[{_RESET};{color + 30}m{text}{_ESC}[{_RESET}m\n"
    sys.stdout.write(msg)
    return msg