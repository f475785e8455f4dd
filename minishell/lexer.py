"""Token and command types, and splitting of an input line into words."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

MAX_ARGS = 99


class TokenType(Enum):
    """Kinds of token in a command line."""

    WORD = auto()
    PIPE = auto()  # |
    REDIRECT_IN = auto()  # <
    REDIRECT_OUT = auto()  # >
    HEREDOC = auto()  # <<
    APPEND = auto()  # >>


@dataclass(frozen=True)
class Token:
    """A typed piece of a command line."""

    type: TokenType
    value: str


@dataclass
class Command:
    """A command with its arguments and redirection settings."""

    cmd: str
    args: list[str] = field(default_factory=list)
    redirect_in: int = 0
    redirect_out: int = 0
    heredoc: int = 0
    append: int = 0


def split_input(line: str) -> list[str]:
    """Split ``line`` on spaces into words; runs of spaces separate once.

    Only the space character separates words. More than MAX_ARGS words
    raise ValueError.
    """
    words = [word for word in line.split(" ") if word]
    if len(words) > MAX_ARGS:
        raise ValueError(f"too many arguments: {len(words)} (at most {MAX_ARGS})")
    return words