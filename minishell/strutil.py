"""String and byte helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

from typing import Callable, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return a single character given as a one-character string or a code point."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer, not bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as code 0.

    Returns the difference of the first differing codes, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing bytes, or 0.
    """
    first = bytes(b1)
    second = bytes(b2)
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(first) or n > len(second):
        raise ValueError("n exceeds the length of an operand")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the NUL character matches the end."""
    wanted = _char(c)
    if wanted == "\0":
        return len(text)
    index = text.find(wanted)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the NUL character matches the end."""
    wanted = _char(c)
    if wanted == "\0":
        return len(text)
    index = text.rfind(wanted)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))