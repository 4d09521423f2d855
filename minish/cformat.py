"""A small printf-style formatter with ``c s p d i u x X o %`` conversions.

Flags understood: ``-`` (left align), ``0`` (zero fill), a width, ``.``
followed by a precision, and ``*`` to take a width or precision from the
arguments. A negative ``*`` width turns on left alignment; a negative ``*``
precision is ignored.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from minish.printf_numeric import (
    FormatFlags,
    format_decimal,
    format_hex,
    format_octal,
    format_other,
)

_END_CONVERSIONS = "cspdiuxX%"
_FLAG_CHARS = " -.*0123456789"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF

__all__ = [
    "FormatFlags",
    "parse_flags",
    "format_char",
    "format_string",
    "format_pointer",
    "sprintf",
    "printf",
]


def _to_int32(value: int) -> int:
    return ((int(value) + 0x80000000) & _UINT_MASK) - 0x80000000


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _read_amount(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    """Read a ``*`` or a run of digits at ``pos``.

    Returns the value and the position of the last character consumed.
    """
    if pos < len(fmt) and fmt[pos] == "*":
        return _to_int32(_next_arg(args)), pos
    start = pos
    while pos < len(fmt) and fmt[pos].isascii() and fmt[pos].isdigit():
        pos += 1
    value = int(fmt[start:pos]) if pos > start else 0
    return value, pos - 1


def _fix_negative(flags: FormatFlags) -> None:
    if flags.precision < 0:
        flags.dot = False
        flags.precision = 0
    elif flags.width < 0:
        flags.minus = True
        flags.width = -flags.width


def parse_flags(
    fmt: str, pos: int, args: Iterator[Any]
) -> tuple[FormatFlags, int]:
    """Parse the flags of one conversion starting at ``pos`` (just after ``%``).

    ``args`` is an iterator from which ``*`` values are taken. Returns the
    flags and the position of the conversion character.
    """
    flags = FormatFlags()
    while (
        pos < len(fmt)
        and fmt[pos] not in _END_CONVERSIONS
        and fmt[pos] in _FLAG_CHARS
    ):
        c = fmt[pos]
        if c == "-":
            flags.minus = True
        elif c == "0":
            flags.zero = True
        elif c == ".":
            flags.dot = True
            flags.precision, pos = _read_amount(fmt, pos + 1, args)
        elif c == "*" or "1" <= c <= "9":
            flags.width, pos = _read_amount(fmt, pos, args)
        if flags.precision < 0 or flags.width < 0:
            _fix_negative(flags)
        pos += 1
    return flags, pos


def format_char(c: str | int, flags: FormatFlags) -> str:
    """Render one character; an integer is taken as a byte value."""
    char = chr(int(c) & 0xFF) if isinstance(c, int) else (c[:1] or "\0")
    if flags.width > 0:
        padding = flags.width - 1
        if flags.minus:
            return char + " " * padding
        fill = "0" if flags.zero else " "
        return fill * padding + char
    return char


def format_string(s: str | None, flags: FormatFlags) -> str:
    """Render a string conversion; ``None`` is shown as ``(null)``."""
    text = "(null)" if s is None else str(s)
    fill = "0" if flags.zero and not flags.minus else " "
    if flags.width > 0:
        shown = text[: flags.precision] if flags.dot else text
        padding = fill * max(flags.width - len(shown), 0)
        return shown + padding if flags.minus else padding + shown
    if flags.dot:
        return text[: flags.precision]
    return text


def format_pointer(n: int | None, flags: FormatFlags) -> str:
    """Render an address as ``0x`` followed by lower-case hexadecimal."""
    value = 0 if n is None else int(n) & _ULONG_MASK
    digits = format(value, "x")
    length = len(digits)
    if flags.dot and flags.precision == 0 and value == 0:
        spaces = " " * max(flags.width - 2, 0)
        return "0x" + spaces if flags.minus else spaces + "0x"
    if flags.width > 0 and flags.dot:
        count = max(flags.precision - length, 0)
        padding = " " * max(flags.width - count - length - 2, 0)
        body = "0x" + "0" * count + digits
        return body + padding if flags.minus else padding + body
    if flags.width > 0 and not flags.zero:
        padding = " " * max(flags.width - 2 - length, 0)
        body = "0x" + digits
        return body + padding if flags.minus else padding + body
    if flags.dot or (flags.width > 0 and flags.zero):
        count = (flags.precision if flags.dot else flags.width - 2) - length
        return "0x" + "0" * max(count, 0) + digits
    return "0x" + digits


def _convert(conv: str, flags: FormatFlags, args: Iterator[Any]) -> str:
    if conv == "c":
        return format_char(_next_arg(args), flags)
    if conv == "s":
        return format_string(_next_arg(args), flags)
    if conv == "p":
        return format_pointer(_next_arg(args), flags)
    if conv in ("d", "i"):
        return format_decimal(_to_int32(_next_arg(args)), flags)
    if conv == "u":
        return format_decimal(int(_next_arg(args)) & _UINT_MASK, flags)
    if conv in ("x", "X"):
        return format_hex(int(_next_arg(args)), flags, conv)
    if conv == "o":
        return format_octal(int(_next_arg(args)), flags)
    return format_other(conv, flags)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Raises TypeError when the format needs more arguments than given.
    """
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        flags, pos = parse_flags(fmt, percent + 1, remaining)
        conv = fmt[pos] if pos < len(fmt) else ""
        pieces.append(_convert(conv, flags, remaining))
        if conv:
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)