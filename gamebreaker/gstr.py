"""String helpers in the style of game-maker string functions."""

from __future__ import annotations

from pathlib import PurePath
from typing import Any


def count(text: str, needle: str) -> int:
    """Number of (possibly overlapping) occurrences of ``needle`` in ``text``."""
    return sum(text.startswith(needle, i) for i in range(len(text) - len(needle) + 1))


def replace(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old``; raise ValueError if there is none."""
    index = text.find(old) if old else -1
    if index < 0:
        raise ValueError(f"{old!r} not found in text")
    return text[:index] + new + text[index + len(old):]


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` with ``new``."""
    if not old:
        raise ValueError("cannot replace an empty string")
    return text.replace(old, new)


def cat(*args: Any) -> str:
    """Concatenate the arguments as strings."""
    return "".join(str(arg) for arg in args)


def shorten(fname: str) -> str:
    """Shorten a file name longer than 8 characters to the ``NAMEXX~1.ext`` form."""
    path = PurePath(fname)
    name = path.name
    if len(name) > 8:
        return name[:6] + "~1" + path.suffix
    return fname


def lowercase(text: str) -> str:
    return text.lower()


def uppercase(text: str) -> str:
    return text.upper()


def char_at(text: str, pos: int) -> str:
    """Character at ``pos``; raise IndexError outside the string."""
    if not 0 <= pos < len(text):
        raise IndexError(f"position {pos} out of range")
    return text[pos]


def ord_at(text: str, pos: int) -> int:
    """Code of the character at ``pos``."""
    return ord(char_at(text, pos))


def length(text: str) -> int:
    return len(text)


def find(substr: str, text: str) -> int:
    """Index of the first occurrence of ``substr`` in ``text``, or -1."""
    return text.find(substr)


def copy(text: str, pos: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` starting at ``pos``."""
    if length < 1:
        return ""
    if pos < 0:
        raise IndexError(f"position {pos} out of range")
    return text[pos:pos + length]


def delete(text: str, pos: int, length: int) -> str:
    """``text`` with ``length`` characters removed from ``pos``."""
    if length < 1:
        return text
    return copy(text, 0, pos) + copy(text, pos + length, len(text) - (pos + length))


def insert(text: str, substr: str, pos: int) -> str:
    """``text`` with ``substr`` inserted before position ``pos``."""
    if not substr:
        return text
    if pos < 0:
        raise IndexError(f"position {pos} out of range")
    return text[:pos] + substr + text[pos:]


def duplicate(text: str, times: int) -> str:
    """``text`` repeated ``times`` times."""
    return text * max(times, 0)