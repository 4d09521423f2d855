"""Syntax checks run on a command line before it is split into tokens.

Each ``check_*`` function looks for one kind of mistake and raises
:class:`ShellSyntaxError` when it finds it. :func:`validate` runs them all
in the order the shell applies them.
"""

from __future__ import annotations

import re

from minish.libutils import is_space

__all__ = [
    "ShellSyntaxError",
    "is_empty_line",
    "check_quotes",
    "check_redirect_runs",
    "check_pipe_first",
    "check_pipe_last",
    "check_double_pipe",
    "check_redirect_pipe",
    "check_redirect_last",
    "check_mixed_redirects",
    "check_semicolon",
    "check_operators",
    "validate",
]

_BLANKS = " \t\r\v\f"
_REDIRECT_RUN = re.compile(r"<+|>+")
_DOUBLE_PIPE = re.compile(r"\|[ \t\r\v\f]*\|")


class ShellSyntaxError(ValueError):
    """A command line the shell refuses to run.

    ``token`` is the offending token, or None when the error is not about
    one token (an unclosed quote).
    """

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token


def _unexpected(token: str) -> ShellSyntaxError:
    return ShellSyntaxError(
        f"minishell: syntax error near unexpected token `{token}'", token
    )


def _skip_blanks(line: str, pos: int) -> int:
    while pos < len(line) and is_space(line[pos]):
        pos += 1
    return pos


def _last_char(line: str) -> str:
    """Last character that is not a blank, or an empty string."""
    return line.rstrip(_BLANKS)[-1:]


def is_empty_line(line: str | None) -> bool:
    """True when ``line`` is missing or holds only blanks."""
    if line is None:
        return True
    return all(is_space(c) for c in line)


def check_quotes(line: str) -> None:
    """Reject a line with an unclosed single or double quote."""
    in_double = False
    in_single = False
    for c in line:
        if c == '"' and not in_single:
            in_double = not in_double
        elif c == "'" and not in_double:
            in_single = not in_single
    if in_double or in_single:
        raise ShellSyntaxError("syntax error: unclosed quote")


def check_redirect_runs(line: str) -> None:
    """Reject three or more ``<`` or ``>`` in a row."""
    for match in _REDIRECT_RUN.finditer(line):
        run = match.group()
        if len(run) >= 3:
            raise ShellSyntaxError(
                f"minishell: syntax error near unexpected token {run}", run
            )


def check_pipe_first(line: str) -> None:
    """Reject a line that starts with a pipe after spaces or tabs."""
    if line.lstrip(" \t").startswith("|"):
        raise _unexpected("|")


def check_pipe_last(line: str) -> None:
    """Reject a line whose last non-blank character is a pipe."""
    if _last_char(line) == "|":
        raise _unexpected("|")


def check_double_pipe(line: str) -> None:
    """Reject two pipes with only blanks between them."""
    if _DOUBLE_PIPE.search(line):
        raise _unexpected("|")


def check_redirect_pipe(line: str) -> None:
    """Reject a redirection followed by a pipe or by the end of the line.

    A single ``>`` directly followed by ``|`` is accepted.
    """
    length = len(line)
    i = 0
    while i < length:
        if line[i] in "<>":
            if i + 1 < length and line[i + 1] == line[i]:
                i += 1
            if (
                line[i] == ">"
                and (i == 0 or line[i - 1] != ">")
                and i + 1 < length
                and line[i + 1] == "|"
            ):
                i += 2
                continue
            i = _skip_blanks(line, i + 1)
            if i >= length or line[i] == "|":
                raise _unexpected("|")
        i += 1


def check_redirect_last(line: str) -> None:
    """Reject a line that ends with a redirection."""
    if _last_char(line) in ("<", ">"):
        raise _unexpected("newline")


def check_mixed_redirects(line: str) -> None:
    """Reject ``<`` followed by ``>`` or ``>`` followed by ``<``."""
    length = len(line)
    i = 0
    while i < length:
        i = _skip_blanks(line, i)
        if i < length and line[i] in "<>":
            first = line[i]
            i = _skip_blanks(line, i + 1)
            if i >= length:
                break
            if {first, line[i]} == {"<", ">"}:
                raise _unexpected(line[i])
        if i >= length:
            break
        i += 1


def check_semicolon(line: str) -> None:
    """Reject any semicolon."""
    if ";" in line:
        raise _unexpected(";")


def check_operators(line: str) -> None:
    """Reject ``&&`` and ``&``."""
    pos = line.find("&")
    if pos < 0:
        return
    if line[pos + 1 : pos + 2] == "&":
        raise _unexpected("&&")
    raise _unexpected("&")


def validate(line: str) -> str:
    """Run every check on ``line`` and return it unchanged when it passes."""
    checks = (
        check_quotes,
        check_semicolon,
        check_operators,
        check_redirect_runs,
        check_redirect_last,
        check_redirect_pipe,
        check_mixed_redirects,
        check_pipe_first,
        check_pipe_last,
        check_double_pipe,
    )
    for check in checks:
        check(line)
    return line