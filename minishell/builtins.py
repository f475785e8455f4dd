"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Union

Environment = Union[Mapping[str, str], Iterable[str]]

_BUILTIN_NAMES = frozenset({"cd", "exit", "pwd"})


def _report(prefix: str, exc: OSError) -> None:
    message = exc.strerror or str(exc)
    print(f"{prefix}: {message}", file=sys.stderr)


def builtin_cd(args: Sequence[str]) -> int:
    """Change the working directory to ``args[1]``, or to $HOME when absent.

    Returns 0 on success and 1 on failure, with a message on stderr.
    """
    if len(args) > 1:
        path = args[1]
    else:
        home = os.environ.get("HOME")
        if not home:
            sys.stderr.write("cd: HOME not set\n")
            return 1
        path = home
    try:
        os.chdir(path)
    except OSError as exc:
        _report("cd", exc)
        return 1
    return 0


def builtin_pwd() -> int:
    """Print the current working directory; return 0, or 1 if it is unknown."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _report("pwd", exc)
        return 1
    print(cwd)
    return 0


def builtin_exit(args: Sequence[str]) -> int:
    """Print ``exit`` and leave the shell with status 0; arguments are ignored."""
    del args
    sys.stdout.write("exit\n")
    sys.stdout.flush()
    raise SystemExit(0)


def builtin_env(envp: Environment) -> int:
    """Print each environment entry on its own line as NAME=VALUE."""
    if isinstance(envp, Mapping):
        entries: Iterable[str] = (f"{name}={value}" for name, value in envp.items())
    else:
        entries = envp
    for entry in entries:
        print(entry)
    return 0


def is_builtin(cmd: str | None) -> bool:
    """True for the commands that the shell handles itself before starting a program."""
    return bool(cmd) and cmd in _BUILTIN_NAMES


def run_builtin(args: Sequence[str], envp: Environment) -> int:
    """Run the built-in named by ``args[0]`` and return its status.

    An empty argument list gives 1; an unknown name gives 0.
    """
    if not args or not args[0]:
        return 1
    name = args[0]
    if name == "cd":
        return builtin_cd(args)
    if name == "exit":
        return builtin_exit(args)
    if name == "pwd":
        return builtin_pwd()
    if name == "env":
        return builtin_env(envp)
    return 0