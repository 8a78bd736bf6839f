"""Byte-buffer helpers and ASCII character classes with the C library's rules."""

from __future__ import annotations

from collections.abc import Sequence

_ALNUM = 8
_ALPHA = 1024
_DIGIT = 2048
_PRINT = 16384


def _require_length(buffer: Sequence[int], n: int, name: str) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(buffer):
        raise ValueError(f"{name} holds fewer than {n} bytes")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _require_length(buffer, n, "buffer")
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: Sequence[int], byte: int, n: int) -> int | None:
    """Return the index of the first byte equal to byte in the first n, or None."""
    _require_length(data, n, "data")
    wanted = byte & 0xFF
    for index, value in enumerate(data[:n]):
        if value == wanted:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch or 0."""
    _require_length(first, n, "first")
    _require_length(second, n, "second")
    for left, right in zip(first[:n], second[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first n bytes of src into dest and return dest."""
    _require_length(dest, n, "dest")
    _require_length(src, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy n bytes of src into dest, correct even when the two overlap."""
    if n == 0 or dest is src:
        return dest
    _require_length(dest, n, "dest")
    _require_length(src, n, "src")
    # Taking a snapshot of the source first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memset(buffer: bytearray, byte: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with byte and return buffer."""
    _require_length(buffer, n, "buffer")
    buffer[:n] = bytes([byte & 0xFF]) * n
    return buffer


def isalpha(code: int) -> int:
    """Return a non-zero flag for an ASCII letter, otherwise 0."""
    if ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z"):
        return _ALPHA
    return 0


def isdigit(code: int) -> int:
    """Return a non-zero flag for an ASCII decimal digit, otherwise 0."""
    if ord("0") <= code <= ord("9"):
        return _DIGIT
    return 0


def isalnum(code: int) -> int:
    """Return a non-zero flag for an ASCII letter or digit, otherwise 0."""
    if isalpha(code) or isdigit(code):
        return _ALNUM
    return 0


def isascii(code: int) -> int:
    """Return 1 for a code in the ASCII range 0 to 127, otherwise 0."""
    return 1 if 0 <= code <= 127 else 0


def isprint(code: int) -> int:
    """Return a non-zero flag for a printable ASCII character, otherwise 0."""
    if 32 <= code <= 126:
        return _PRINT
    return 0