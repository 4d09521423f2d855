"""Splitting of a checked command line into tokens."""

from __future__ import annotations

from minish.syntax import validate

__all__ = ["squeeze_spaces", "remove_quotes", "split_tokens", "lex"]

_BLANKS = " \t"
_QUOTES = "'\""


def squeeze_spaces(text: str) -> str:
    """Trim spaces and tabs at both ends and turn each run of them into one space.

    Blanks inside single or double quotes are kept as they are.
    """
    body = text.strip(_BLANKS)
    out: list[str] = []
    quote: str | None = None
    i = 0
    while i < len(body):
        c = body[i]
        if c in _QUOTES:
            if quote is None:
                quote = c
            elif quote == c:
                quote = None
            out.append(c)
            i += 1
        elif c in _BLANKS and quote is None:
            out.append(" ")
            while i < len(body) and body[i] in _BLANKS:
                i += 1
        else:
            out.append(c)
            i += 1
    return "".join(out)


def remove_quotes(text: str) -> str:
    """Drop every double quote from ``text``."""
    return text.replace('"', "")


def _token_end(text: str, start: int, sep: str) -> int:
    quote: str | None = None
    end = start
    while end < len(text) and (quote is not None or text[end] != sep):
        c = text[end]
        if c in _QUOTES:
            if quote is None:
                quote = c
            elif quote == c:
                quote = None
        end += 1
    return end


def split_tokens(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` after :func:`squeeze_spaces`.

    A separator inside quotes does not split; quotes stay in the tokens.
    """
    squeezed = squeeze_spaces(text)
    tokens: list[str] = []
    start = 0
    while start < len(squeezed):
        while start < len(squeezed) and squeezed[start] == sep:
            start += 1
        if start >= len(squeezed):
            break
        end = _token_end(squeezed, start, sep)
        tokens.append(squeezed[start:end])
        start = end
    return tokens


def lex(line: str | None) -> list[str]:
    """Check ``line`` and split it into space-separated tokens.

    A missing or empty line gives no tokens. Raises
    :class:`~minish.syntax.ShellSyntaxError` when a check fails.
    """
    if not line:
        return []
    validate(line)
    return split_tokens(line, " ")