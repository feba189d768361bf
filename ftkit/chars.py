"""Character classification and case conversion for ASCII code points."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_byte(code: int) -> bool:
    return 0 <= code <= 255


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    if not _is_byte(code):
        return False
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    code = _code(c)
    if not _is_byte(code):
        return False
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map a lowercase ASCII letter to uppercase; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _convert(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Map an uppercase ASCII letter to lowercase; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _convert(c, code + 32)
    return c