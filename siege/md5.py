"""MD5 message digest (RFC 1321) for memory blocks, streams and incremental input."""

from __future__ import annotations

import struct
from typing import BinaryIO, Union

__all__ = ["Md5", "md5_buffer", "md5_stream"]

BytesLike = Union[bytes, bytearray, memoryview]

_MASK = 0xFFFFFFFF
_BLOCK = 64
_STREAM_BLOCKSIZE = 4096

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# T[i] = floor(2**32 * abs(sin(i + 1))), in the order the rounds use them.
_T = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

_WORDS = struct.Struct("<16I")


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _compress(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Run the four MD5 rounds over one 64-byte block."""
    words = _WORDS.unpack(block)
    a, b, c, d = state
    for i in range(64):
        round_no = i >> 4
        if round_no == 0:
            f = d ^ (b & (c ^ d))
            k = i
        elif round_no == 1:
            f = c ^ (d & (b ^ c))
            k = (5 * i + 1) % 16
        elif round_no == 2:
            f = b ^ c ^ d
            k = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & _MASK))
            k = (7 * i) % 16
        f = (f + a + _T[i] + words[k]) & _MASK
        a, d, c = d, c, b
        b = (b + _rotl(f, _SHIFTS[round_no][i & 3])) & _MASK
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"MD5 input must be bytes-like, not {type(data).__name__}")
    return bytes(data)


class Md5:
    """Incremental MD5 computation with a hashlib-like interface."""

    digest_size = 16
    block_size = _BLOCK
    name = "md5"

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = _INITIAL_STATE
        self._length = 0
        self._pending = b""
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the computation; any length is accepted."""
        chunk = self._pending + _as_bytes(data)
        self._length += len(chunk) - len(self._pending)
        whole = len(chunk) - len(chunk) % _BLOCK
        state = self._state
        for offset in range(0, whole, _BLOCK):
            state = _compress(state, chunk[offset:offset + _BLOCK])
        self._state = state
        self._pending = chunk[whole:]

    def copy(self) -> "Md5":
        """Return an independent copy of the current computation."""
        clone = Md5()
        clone._state = self._state
        clone._length = self._length
        clone._pending = self._pending
        return clone

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far (little-endian words)."""
        pending = self._pending
        pad_len = (56 - len(pending) - 1) % _BLOCK
        tail = (
            pending
            + b"\x80"
            + b"\x00" * pad_len
            + struct.pack("<Q", (self._length * 8) & 0xFFFFFFFFFFFFFFFF)
        )
        state = self._state
        for offset in range(0, len(tail), _BLOCK):
            state = _compress(state, tail[offset:offset + _BLOCK])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as 32 lower-case hexadecimal characters."""
        return self.digest().hex()


def md5_buffer(data: BytesLike) -> bytes:
    """Compute the MD5 digest of a block of memory."""
    return Md5(data).digest()


def md5_stream(stream: BinaryIO) -> bytes:
    """Compute the MD5 digest of everything readable from a binary stream.

    Read errors from the stream propagate as raised by it.
    """
    ctx = Md5()
    while True:
        block = stream.read(_STREAM_BLOCKSIZE)
        if not block:
            break
        ctx.update(block)
    return ctx.digest()