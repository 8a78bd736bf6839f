"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO


def putchar_fd(char: str | int, stream: TextIO) -> None:
    """Write a single character, given as a string or a byte code, to stream."""
    if isinstance(char, int):
        char = chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError("putchar_fd writes exactly one character")
    stream.write(char)


def putstr_fd(text: str | None, stream: TextIO) -> None:
    """Write text to stream; a missing text writes nothing."""
    if text is None:
        return
    stream.write(text)


def putendl_fd(text: str | None, stream: TextIO) -> None:
    """Write text and a newline to stream; a missing text writes nothing."""
    if text is None:
        return
    stream.write(text + "\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write number in decimal to stream."""
    stream.write(str(int(number)))