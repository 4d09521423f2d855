"""Pipe and redirection detection over a list of tokens."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Redirect", "Command", "has_pipe", "detect_redirects"]


@dataclass
class Redirect:
    """Redirections seen in a command.

    ``in_`` is 1 for ``>`` and 2 for ``>>``; ``out`` is 1 for ``<`` and
    2 for ``<<``. Zero means no redirection of that kind.
    """

    in_: int = 0
    out: int = 0


@dataclass
class Command:
    """One command of a pipeline: its line, its tokens and what follows it."""

    line: str | None = None
    tokens: list[str] = field(default_factory=list)
    pipe: bool = False
    redirect: Redirect = field(default_factory=Redirect)
    next: Command | None = None

    def next_node(self) -> Command | None:
        """Return the command after a pipe, creating it when needed.

        Returns None when the tokens hold no pipe.
        """
        if not has_pipe(self.tokens):
            return None
        self.pipe = True
        if self.next is None:
            self.next = Command()
        return self.next


def has_pipe(tokens: list[str]) -> bool:
    """True when one of ``tokens`` is a lone ``|``."""
    return "|" in tokens


def detect_redirects(tokens: list[str]) -> Redirect:
    """Find the redirection operators among ``tokens``.

    When an operator kind occurs several times, the last one wins.
    """
    redirect = Redirect()
    for token in tokens:
        if token == ">":
            redirect.in_ = 1
        elif token == ">>":
            redirect.in_ = 2
        elif token == "<":
            redirect.out = 1
        elif token == "<<":
            redirect.out = 2
    return redirect