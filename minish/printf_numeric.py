"""Formatting of numeric conversions (``d i u x X o``) and unknown conversions."""

from __future__ import annotations

from dataclasses import dataclass

from minish.libutils import base_len, nbr_len

_UINT_MASK = 0xFFFFFFFF


@dataclass
class FormatFlags:
    """Flags and sizes parsed from one conversion specification."""

    minus: bool = False
    zero: bool = False
    dot: bool = False
    precision: int = 0
    width: int = 0


def _align(body: str, padding: int, left: bool) -> str:
    """Pad ``body`` with ``padding`` spaces on the right or the left."""
    spaces = " " * max(padding, 0)
    return body + spaces if left else spaces + body


def _digits(n: int, base: int, upper: bool = False) -> str:
    if base == 16:
        return format(n, "X" if upper else "x")
    if base == 8:
        return format(n, "o")
    return str(n)


def _decimal_prewid(n: int, flags: FormatFlags) -> str:
    length = nbr_len(n)
    count = flags.precision - length
    extra = count + (1 if n < 0 else 0)
    padding = max(flags.width - length - max(extra, 0), 0)
    body = ("-" if n < 0 else "") + "0" * max(count, 0) + str(abs(n))
    return _align(body, padding, flags.minus)


def _decimal_pre(n: int, flags: FormatFlags) -> str:
    count = flags.precision if flags.dot else flags.width
    length = nbr_len(n)
    if n < 0 and flags.dot:
        count -= length - 1
    else:
        count -= length
    sign = "-" if n < 0 else ""
    return sign + "0" * max(count, 0) + str(abs(n))


def format_decimal(n: int, flags: FormatFlags) -> str:
    """Render a signed or unsigned decimal conversion."""
    if flags.dot and flags.precision == 0 and n == 0:
        return " " * max(flags.width, 0)
    if flags.width > 0 and flags.dot:
        return _decimal_prewid(n, flags)
    if flags.width > 0 and (not flags.zero or flags.minus):
        return _align(str(n), flags.width - nbr_len(n), flags.minus)
    if flags.dot or (flags.width > 0 and flags.zero):
        return _decimal_pre(n, flags)
    return str(n)


def _format_unsigned(n: int, flags: FormatFlags, base: int, upper: bool) -> str:
    n &= _UINT_MASK
    if flags.dot and flags.precision == 0 and n == 0:
        return " " * max(flags.width, 0)
    digits = _digits(n, base, upper)
    length = base_len(n, base)
    if flags.width > 0 and flags.dot:
        count = max(flags.precision - length, 0)
        padding = max(flags.width - length - count, 0)
        return _align("0" * count + digits, padding, flags.minus)
    if flags.width > 0 and (not flags.zero or flags.minus):
        return _align(digits, flags.width - length, flags.minus)
    if flags.dot or (flags.width > 0 and flags.zero):
        count = (flags.precision if flags.dot else flags.width) - length
        return "0" * max(count, 0) + digits
    return digits


def format_hex(n: int, flags: FormatFlags, conversion: str) -> str:
    """Render ``n`` as an unsigned 32-bit hexadecimal; ``'X'`` selects upper case."""
    return _format_unsigned(n, flags, 16, conversion == "X")


def format_octal(n: int, flags: FormatFlags) -> str:
    """Render ``n`` as an unsigned 32-bit octal number."""
    return _format_unsigned(n, flags, 8, False)


def format_other(c: str, flags: FormatFlags) -> str:
    """Render a character that is not a known conversion, ``%`` included.

    An empty character (end of the format) yields nothing.
    """
    if not c or c == "\0":
        return ""
    padding = flags.width - 1
    if flags.minus:
        return c + " " * max(padding, 0)
    fill = "0" if flags.zero else " "
    return fill * max(padding, 0) + c