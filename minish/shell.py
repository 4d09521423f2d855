"""Interactive entry points: reading lines, running programs, the main loop."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import TextIO

from minish.builtins import ShellState
from minish.lexer import lex
from minish.parser import Command, detect_redirects
from minish.syntax import ShellSyntaxError, is_empty_line

try:
    import readline as _readline
except ImportError:  # platforms without GNU readline
    _readline = None

__all__ = [
    "MAX_INPUT",
    "MAX_ARGS",
    "launch_program",
    "read_command",
    "run_loop",
    "describe_line",
    "main",
]

MAX_INPUT = 1024
MAX_ARGS = 64


def launch_program(args: list[str]) -> int:
    """Run a program and wait for it; return its exit status.

    A program that cannot be started is reported on standard error and
    counts as status 1.
    """
    try:
        completed = subprocess.run(list(args))
    except OSError as exc:
        sys.stderr.write(f"minishell: {exc.strerror}\n")
        return 1
    return completed.returncode


def read_command(prompt: str) -> str | None:
    """Read one line with ``prompt``; None at end of input.

    Lines that are not blank are added to the history.
    """
    if _readline is not None:
        _readline.set_auto_history(False)
    try:
        line = input(prompt)
    except EOFError:
        return None
    if _readline is not None and not is_empty_line(line):
        _readline.add_history(line)
    return line


def run_loop(stream: TextIO, state: ShellState | None = None) -> int:
    """Read commands from ``stream`` until ``exit`` or end of input.

    Words are split on spaces; ``cd`` and ``exit`` are handled here and
    everything else is started as a program.
    """
    state = state if state is not None else ShellState()
    while True:
        state.out.write("minishell$ ")
        state.out.flush()
        raw = stream.readline(MAX_INPUT - 1)
        if not raw:
            break
        line = raw.split("\n", 1)[0]
        args = [word for word in line.split(" ") if word][: MAX_ARGS - 1]
        if not args:
            continue
        if args[0] == "cd":
            state.cd(args)
        elif args[0] == "exit":
            break
        else:
            state.last_status = launch_program(args)
    return 0


def describe_line(line: str) -> str:
    """Check and tokenize ``line``; report its tokens and redirections."""
    command = Command(line=line, tokens=lex(line))
    command.redirect = detect_redirects(command.tokens)
    lines = ["Tokens:"]
    lines.extend(f"  [{i}]: {token}" for i, token in enumerate(command.tokens))
    lines.append("")
    lines.append("Redirections:")
    lines.append(f"IN:  {command.redirect.in_} ")
    lines.append(f"OUT: {command.redirect.out} ")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Read one line, show its tokens and redirections; ``--loop`` runs the shell."""
    parser = argparse.ArgumentParser(prog="minish")
    parser.add_argument(
        "--loop", action="store_true", help="read and run commands until exit"
    )
    options = parser.parse_args(argv)
    if options.loop:
        return run_loop(sys.stdin, ShellState())

    line = read_command("minishell> ")
    if line is None:
        print("No input. Exiting.")
        return 1
    try:
        if not line:
            raise ShellSyntaxError("empty line")
        report = describe_line(line)
    except ShellSyntaxError as exc:
        if line:
            sys.stderr.write(exc.message + "\n")
        print("Tokenization error.")
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())