"""A growable text buffer that holds a downloaded page."""

from __future__ import annotations

__all__ = ["Page"]

_INITIAL_SLACK = 24576


class Page:
    """Accumulates page text; capacity grows when appended text overflows it."""

    def __init__(self, text: str = "") -> None:
        self._chunks: list[str] = [text] if text else []
        self._length = len(text)
        self._size = self._length + _INITIAL_SLACK

    def concat(self, text: str | None, length: int | None = None) -> None:
        """Append up to ``length`` characters of ``text`` (all of it if None).

        Empty or missing text and a negative length are ignored.
        """
        if not text:
            return
        if length is None:
            length = len(text)
        if length < 0:
            return
        piece = text[:length]
        if self._length + len(piece) > self._size:
            self._size += len(piece) + 1
        if piece:
            self._chunks.append(piece)
            self._length += len(piece)

    def clear(self) -> None:
        """Drop the contents; the capacity is kept."""
        self._chunks = []
        self._length = 0

    def value(self) -> str:
        """Return the accumulated text."""
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def size(self) -> int:
        """Return the current capacity."""
        return self._size

    def __len__(self) -> int:
        return self._length