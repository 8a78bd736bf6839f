"""String helpers with the lookup, comparison, copy and case rules of the C string library."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first char in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last char in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters and return the difference of the first mismatch."""
    for position in range(min(n, max(len(first), len(second)))):
        left = ord(first[position]) if position < len(first) else 0
        right = ord(second[position]) if position < len(second) else 0
        if left != right:
            return left - right
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return where little first lies wholly within the first length characters of big."""
    if not little:
        return 0
    if length <= 0:
        return None
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove every character of charset from both ends of text."""
    if text is None or charset is None:
        raise TypeError("strtrim needs a text and a charset")
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length the full result would have had.
    """
    if size <= 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def striteri(buffer: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each element of buffer in place with func(index, element)."""
    for index, char in enumerate(buffer):
        buffer[index] = func(index, char)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string of func(index, char) for every character of text."""
    return "".join(func(index, char) for index, char in enumerate(text))


def itoa(number: int) -> str:
    """Return the decimal representation of number."""
    return str(int(number))


def tolower(code: int) -> int:
    """Return the lower-case code of an ASCII capital letter, other codes unchanged."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def toupper(code: int) -> int:
    """Return the upper-case code of an ASCII small letter, other codes unchanged."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code