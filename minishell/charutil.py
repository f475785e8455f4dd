"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

import sys
from typing import TextIO, TypeVar, Union

CharLike = Union[str, int]
_C = TypeVar("_C", str, int)

_ATOI_SPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the code point of a single character or an integer as given."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, code points 32 to 126."""
    return 32 <= _code(c) <= 126


def _shift_case(c: _C, low: str, high: str, offset: int) -> _C:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
        return chr(code) if isinstance(c, str) else code  # type: ignore[return-value]
    return c


def toupper(c: _C) -> _C:
    """Map an ASCII lower-case letter to upper case; return anything else unchanged."""
    return _shift_case(c, "a", "z", ord("A") - ord("a"))


def tolower(c: _C) -> _C:
    """Map an ASCII upper-case letter to lower case; return anything else unchanged."""
    return _shift_case(c, "A", "Z", ord("a") - ord("A"))


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    return str(n)


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of ``n`` to ``stream`` (stdout by default)."""
    (sys.stdout if stream is None else stream).write(itoa(n))


def putendl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.write("\n")