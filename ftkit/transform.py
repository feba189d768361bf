"""String building: integer formatting, splitting, trimming, slicing and mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional


def _check_int(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def int_to_str(n: int) -> str:
    """Return the decimal form of ``n``, with a leading minus sign when negative."""
    return str(_check_int(n))


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def trim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` that appears in ``charset``."""
    return s.strip(charset)


def substring(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start > len(s):
        return ""
    return s[start:start + length]


def join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each item of ``chars``, in place.

    When ``func`` returns a character it replaces the item at that index;
    returning ``None`` leaves the item as it was.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement