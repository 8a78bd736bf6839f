"""A small printf supporting the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys

_CONSUMING = frozenset("csdiuxXp")


class FormatError(ValueError):
    """Raised for a format string that cannot be rendered."""


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def convert_one(spec: str, arg: object = None) -> str:
    """Render one conversion; unknown conversions render as nothing."""
    if spec == "c":
        if isinstance(arg, int):
            return chr(arg & 0xFF)
        return str(arg)[:1]
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in ("d", "i"):
        return str(_int32(int(arg)))
    if spec == "u":
        return str(int(arg) & 0xFFFFFFFF)
    if spec == "x":
        return format(int(arg) & 0xFFFFFFFF, "x")
    if spec == "X":
        return format(int(arg) & 0xFFFFFFFF, "X")
    if spec == "p":
        if arg is None or arg == 0:
            return "(nil)"
        address = arg if isinstance(arg, int) else id(arg)
        return "0x" + format(address & 0xFFFFFFFFFFFFFFFF, "x")
    if spec == "%":
        return "%"
    return ""


def render(fmt: str, *args: object) -> str:
    """Return fmt with each conversion replaced by its argument."""
    if fmt is None:
        raise FormatError("no format string")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec in _CONSUMING:
            try:
                arg = next(remaining)
            except StopIteration:
                raise FormatError(f"missing argument for %{spec}") from None
            pieces.append(convert_one(spec, arg))
        else:
            pieces.append(convert_one(spec))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the rendered format to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)