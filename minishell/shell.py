"""The interactive read-and-run loop."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from collections.abc import Sequence

from minishell.builtins import Environment, is_builtin, run_builtin
from minishell.lexer import split_input

PROMPT = "minishell$"


def _run_program(args: list[str]) -> int:
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        completed = subprocess.run(args, check=False)
    except OSError as exc:
        print(f"minishell: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return completed.returncode


def execute_line(line: str, envp: Environment) -> int:
    """Run one input line and return its exit status.

    Built-ins run inside the shell; anything else is started as a program
    found on PATH. A blank line does nothing and gives 0.
    """
    args = split_input(line)
    if not args:
        return 0
    if is_builtin(args[0]):
        return run_builtin(args, envp)
    return _run_program(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Read lines at the prompt and run them until end of input."""
    del argv
    with contextlib.suppress(ImportError):
        import readline  # noqa: F401  (gives input() line editing and history)

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print("bye!")
            break
        try:
            execute_line(line, os.environ)
        except ValueError as exc:
            print(f"minishell: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())