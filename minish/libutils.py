"""Small character, number and string helpers used by the shell."""

from __future__ import annotations

_SPACE = " \t\r\v\f"
_SPACE_NL = " \t\n\r\v\f"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_space(c: str) -> bool:
    """Return True for a blank character other than newline."""
    return len(c) == 1 and c in _SPACE


def is_space_nl(c: str) -> bool:
    """Return True for a blank character, newline included."""
    return len(c) == 1 and c in _SPACE_NL


def count_in(c: str, base: str) -> int:
    """Count how many times the character ``c`` occurs in ``base``."""
    if not c:
        return 0
    return base.count(c)


def index_in(c: str, base: str) -> int:
    """Return the first position of ``c`` in ``base``, or -1."""
    if not c:
        return -1
    return base.find(c)


def base_len(n: int, base: int) -> int:
    """Number of characters needed to write ``n`` in ``base``, sign included.

    Bases below 2 yield 0.
    """
    if base < 2:
        return 0
    if n == 0:
        return 1
    size = 1 if n < 0 else 0
    value = abs(n)
    while value:
        value //= base
        size += 1
    return size


def nbr_len(n: int) -> int:
    """Number of characters of ``n`` in decimal, sign included."""
    return base_len(n, 10)


def hex_len(n: int) -> int:
    """Number of characters of ``n`` in hexadecimal, sign included."""
    return base_len(n, 16)


def power(nbr: int, exponent: int) -> int:
    """Raise ``nbr`` to ``exponent``; a negative exponent leaves ``nbr`` as is."""
    if exponent == 0:
        return 1
    return nbr ** max(exponent, 1)


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional blanks and one sign.

    Anything that does not parse yields 0, as the digits simply stop.
    """
    pos = skip_spacenl(text, 0)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    num = 0
    for c in text[pos:]:
        if not _is_digit(c):
            break
        num = num * 10 + (ord(c) - ord("0"))
    return num * sign


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def strtrim(text: str | None, charset: str | None) -> str:
    """Remove characters of ``charset`` from both ends of ``text``.

    A missing argument yields the text ``"(null)"``.
    """
    if text is None or charset is None:
        return "(null)"
    return text.strip(charset)


def strisnum(text: str | None) -> bool:
    """True if ``text`` is an optional sign followed only by digits."""
    if text is None:
        return False
    body = text[1:] if text[:1] in ("-", "+") else text
    return all(_is_digit(c) for c in body)


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the position of the match, or -1.
    """
    if not needle:
        return 0
    return haystack[: max(length, 0)].find(needle)


def _skip_while(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def skip_space(text: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not a blank."""
    return _skip_while(text, pos, _SPACE)


def skip_spacenl(text: str, pos: int) -> int:
    """Like :func:`skip_space` but newlines are skipped too."""
    return _skip_while(text, pos, _SPACE_NL)


def skip_chars(text: str, pos: int, chars: str) -> int:
    """Return the first position at or after ``pos`` not in ``chars``."""
    return _skip_while(text, pos, chars)