"""Small string helpers: chomp, trimming, emptiness checks and splitting."""

from __future__ import annotations

__all__ = ["chomp", "rtrim", "ltrim", "trim", "empty", "word_count", "split"]

# the characters isspace() accepts in the C locale
_SPACE = " \t\n\v\f\r"


def chomp(text: str) -> str:
    """Remove a single trailing newline."""
    return text[:-1] if text.endswith("\n") else text


def rtrim(text: str | None) -> str | None:
    """Strip whitespace from the right; None stays None."""
    return None if text is None else text.rstrip(_SPACE)


def ltrim(text: str | None) -> str | None:
    """Strip whitespace from the left; None stays None."""
    return None if text is None else text.lstrip(_SPACE)


def trim(text: str | None) -> str | None:
    """Strip whitespace from both ends; None stays None."""
    return None if text is None else text.strip(_SPACE)


def empty(text: str | None) -> bool:
    """True if the text is None, empty or only whitespace."""
    return not text or not text.strip(_SPACE)


def _check_pattern(pattern: str) -> None:
    if len(pattern) != 1:
        raise ValueError("separator must be a single character")


def word_count(pattern: str, text: str) -> int:
    """Count the runs of characters between occurrences of the separator."""
    _check_pattern(pattern)
    return sum(1 for part in text.split(pattern) if part)


def split(pattern: str, text: str) -> list[str]:
    """Split on a single-character separator, dropping empty pieces."""
    _check_pattern(pattern)
    return [part for part in text.split(pattern) if part]