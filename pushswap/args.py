"""Splitting and validating the command-line numbers."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the arguments are not a list of distinct int values."""


def is_blank(text: str | None) -> bool:
    """Return True when text is missing or made only of whitespace."""
    if text is None:
        return True
    return all(char in _SPACES for char in text)


def split(text: str, separator: str) -> list[str]:
    """Split text on separator, dropping empty pieces."""
    return [piece for piece in text.split(separator) if piece]


def split_arguments(argv: Iterable[str]) -> list[str]:
    """Split every argument on spaces into one flat list of tokens."""
    tokens: list[str] = []
    for argument in argv:
        if is_blank(argument):
            raise ArgumentError("ERROR")
        tokens.extend(split(argument, " "))
    return tokens


def _parse_prefix(text: str) -> tuple[int, int]:
    """Return the signed leading number of text and how many characters it used."""
    position = 0
    while position < len(text) and text[position] in _SPACES:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < len(text) and text[position] in _DIGITS:
        result = result * 10 + int(text[position])
        position += 1
    return sign * result, position


def atoi(text: str) -> int:
    """Read the leading integer of text as a 32-bit int, wrapping on overflow."""
    value, _ = _parse_prefix(text)
    return (value - INT_MIN) % 2**32 + INT_MIN


def convert(text: str) -> int:
    """Read the leading integer of text; longer than 11 characters is an error."""
    value, used = _parse_prefix(text)
    if used > 11:
        raise ArgumentError("Error")
    return value


def is_numeric(token: str) -> bool:
    """Return True when token is digits with an optional leading sign."""
    body = token
    if len(token) > 1 and token[0] in "+-":
        body = token[1:]
    return all(char in _DIGITS for char in body)


def check_errors(tokens: list[str]) -> None:
    """Raise ArgumentError unless every token is a distinct in-range integer."""
    if not all(is_numeric(token) for token in tokens):
        raise ArgumentError("ERROR")
    if any(not INT_MIN <= convert(token) <= INT_MAX for token in tokens):
        raise ArgumentError("ERROR")
    seen: set[int] = set()
    for token in tokens:
        value = atoi(token)
        if value in seen:
            raise ArgumentError("ERROR")
        seen.add(value)


def parse_arguments(argv: Iterable[str]) -> list[int]:
    """Turn the arguments into the values of stack a, top first."""
    tokens = split_arguments(argv)
    check_errors(tokens)
    return [atoi(token) for token in tokens]