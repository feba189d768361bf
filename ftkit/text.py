"""String searching, bounded comparison and copying, and integer parsing."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import NamedTuple, Optional

_WHITESPACE = frozenset(" \t\n\v\f\r")
_TERMINATOR = "\0"


class Bounded(NamedTuple):
    """Result of a size-bounded copy or concatenation.

    ``text`` is what fits in the destination. ``length`` is the length the
    full result would have had, so ``length >= size`` means it was truncated.
    """

    text: str
    length: int


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def length(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def find_char(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` finds the end of the string and returns ``len(s)``.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for ``"\\0"`` finds the end of the string and returns ``len(s)``.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def find_bounded(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of the first ``little`` lying wholly within ``big[:n]``.

    An empty ``little`` is always found at index 0; ``None`` means no match.
    """
    _check_size(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match, otherwise the difference of the code points of
    the first unequal characters; the end of a string counts as code point 0.
    """
    _check_size(n, "n")
    pairs = zip_longest(s1, s2, fillvalue=_TERMINATOR)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _TERMINATOR:
            break
    return 0


def bounded_copy(src: str, size: int) -> Bounded:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator."""
    _check_size(size, "size")
    if size == 0:
        return Bounded("", len(src))
    return Bounded(src[: size - 1], len(src))


def bounded_concat(dst: str, src: str, size: int) -> Bounded:
    """Append ``src`` to ``dst`` in a destination of ``size`` slots, one kept for the terminator.

    When ``size`` leaves no room past ``dst``, ``dst`` is returned unchanged with
    length ``size + len(src)``.
    """
    _check_size(size, "size")
    if size <= len(dst):
        return Bounded(dst, size + len(src))
    room = size - len(dst) - 1
    return Bounded(dst + src[:room], len(dst) + len(src))


def parse_int(s: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    rest = s.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value