"""Commands the shell runs itself rather than starting a program."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

from minish.libutils import atoi

__all__ = ["ShellExit", "ShellState"]


class ShellExit(Exception):
    """Raised by the ``exit`` command; ``code`` is the requested status."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ShellState:
    """Environment, last status and output streams of a shell session."""

    variables: dict[str, str] = field(default_factory=lambda: dict(os.environ))
    last_status: int = 0
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    def echo(self, args: list[str]) -> int:
        """Print the arguments separated by spaces; a first ``-n`` drops the newline."""
        words = args[1:]
        newline = True
        if words and words[0] == "-n":
            newline = False
            words = words[1:]
        self.out.write(" ".join(words))
        if newline:
            self.out.write("\n")
        return 0

    def cd(self, args: list[str]) -> int:
        """Change directory to the argument, or to ``HOME`` without one.

        Failures are reported on the error stream; the shell keeps running,
        so 1 is returned either way.
        """
        path = args[1] if len(args) > 1 else self.variables.get("HOME")
        if path is None:
            self.err.write("cd: HOME not set\n")
            return 1
        try:
            os.chdir(path)
        except OSError as exc:
            self.err.write(f"cd: {exc.strerror}\n")
        return 1

    def pwd(self) -> int:
        """Print the current directory."""
        try:
            self.out.write(os.getcwd() + "\n")
        except OSError as exc:
            self.err.write(f"pwd: {exc.strerror}\n")
        return 0

    def env(self) -> int:
        """Print every variable as ``NAME=value``."""
        for name, value in self.variables.items():
            self.out.write(f"{name}={value}\n")
        return 0

    def unset(self, args: list[str]) -> int:
        """Remove the named variables; unknown names are ignored."""
        for name in args[1:]:
            self.variables.pop(name, None)
        return 0

    def exit(self, args: list[str]) -> None:
        """Leave the shell with the given status, or the last one."""
        code = self.last_status
        if len(args) > 1:
            code = atoi(args[1])
        raise ShellExit(code)