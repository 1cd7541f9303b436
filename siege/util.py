"""Utility functions: time option parsing, string matching and debug output."""

from __future__ import annotations

import os
import string
import sys

from siege.notify import Level, notify

__all__ = [
    "parse_time",
    "substring",
    "okay",
    "strmatch",
    "startswith",
    "endswith",
    "uppercase",
    "lowercase",
    "stristr",
    "strncasestr",
    "elapsed_time",
    "rand_r",
    "urandom",
    "echo",
    "debug",
]

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_RAND_MAX = 2147483647
_MESSAGE_LIMIT = 255


def _fold(text: str) -> str:
    return text.translate(_TO_LOWER)


def parse_time(text: str) -> tuple[int, int]:
    """Parse a -t/--time value such as ``30s``, ``5m`` or ``1h``.

    Returns ``(time, secs)``. With a unit, time is 1 and secs the duration;
    without one, the number is taken as minutes and time keeps the number.
    Text without leading digits gives ``(0, 0)``.
    """
    digits = len(text) - len(text.lstrip(string.digits))
    if digits == 0:
        return 0, 0
    amount = int(text[:digits])
    factors = {"s": 1, "m": 60, "h": 3600}
    for ch in text[digits:]:
        factor = factors.get(ch.translate(_TO_LOWER))
        if factor is not None:
            return 1, amount * factor
    return amount, amount * 60 if amount > 0 else 0


def substring(text: str, start: int, length: int) -> str | None:
    """Return up to ``length`` characters from ``start``; None if out of range."""
    if length < 1 or start < 0 or start > len(text):
        return None
    return text[start:start + length]


def okay(code: int) -> bool:
    """True for informational and success HTTP status codes (100-299)."""
    return 100 <= code <= 299


def strmatch(option: str, param: str) -> bool:
    """Case-insensitive equality."""
    return len(option) == len(param) and _fold(option) == _fold(param)


def startswith(prefix: str, text: str) -> bool:
    """Case-sensitive prefix test."""
    return text.startswith(prefix)


def endswith(suffix: str | None, text: str | None) -> bool:
    """Case-sensitive suffix test; False if either side is None."""
    if text is None or suffix is None:
        return False
    return text.endswith(suffix)


def uppercase(text: str, length: int) -> str:
    """Upper-case the first ``length`` ASCII letters of the text."""
    return text[:length].translate(_TO_UPPER) + text[length:]


def lowercase(text: str, length: int) -> str:
    """Lower-case the first ``length`` ASCII letters of the text."""
    return text[:length].translate(_TO_LOWER) + text[length:]


def stristr(haystack: str, needle: str) -> str | None:
    """Case-insensitive search; returns the haystack from the match on, or None."""
    index = _fold(haystack).find(_fold(needle))
    return None if index < 0 else haystack[index:]


def strncasestr(text: str, needle: str, length: int) -> str | None:
    """Case-insensitive search within the first ``length`` characters.

    Returns the text from the match on, or None. Empty inputs never match.
    """
    window = text[:length]
    if not window or not needle or len(needle) > len(window):
        return None
    index = _fold(window).find(_fold(needle))
    return None if index < 0 else text[index:]


def elapsed_time(ticks: int) -> float:
    """Convert clock ticks to seconds."""
    try:
        per_second = os.sysconf("SC_CLK_TCK")
    except (AttributeError, ValueError, OSError):
        per_second = 100
    return ticks / per_second


def rand_r(seed: int) -> int:
    """One step of the POSIX reentrant generator; the result is also the next seed."""
    return ((seed * 1103515245 + 12345) & 0xFFFFFFFFFFFFFFFF) % (_RAND_MAX + 1)


def urandom() -> int:
    """A random signed 32-bit integer from the system's random source."""
    return int.from_bytes(os.urandom(4), sys.byteorder, signed=True)


def _render(fmt: str, args: tuple) -> str:
    text = fmt % args if args else fmt
    return text[:_MESSAGE_LIMIT]


def _debug_output(text: str) -> None:
    if len(text) == 1:
        sys.stdout.write(text)
    else:
        notify(Level.DEBUG, text)


def echo(fmt: str, *args: object, quiet: bool = False, get: bool = False,
         enabled: bool = False) -> None:
    """Print progress output.

    Nothing is printed when quiet. In get mode the text goes to standard
    output as is; otherwise it is shown only when debugging is enabled.
    """
    if quiet:
        return
    text = _render(fmt, args)
    if get:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    if enabled:
        _debug_output(text)


def debug(fmt: str, *args: object, quiet: bool = False, enabled: bool = False) -> None:
    """Print a debug message when enabled and not quiet."""
    if quiet or not enabled:
        return
    _debug_output(_render(fmt, args))