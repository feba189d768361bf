"""A small printf: %c %s %d %i %u %x %X %p, writing to a text stream."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _int_arg(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_int_arg(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda v: str(_signed32(_int_arg(v, "d"))),
    "i": lambda v: str(_signed32(_int_arg(v, "i"))),
    "u": lambda v: str(_int_arg(v, "u") & _UINT_MASK),
    "x": lambda v: format(_int_arg(v, "x") & _UINT_MASK, "x"),
    "X": lambda v: format(_int_arg(v, "X") & _UINT_MASK, "X"),
    "p": _pointer,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        # Any other character after '%' yields a literal '%' and is consumed.
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"missing argument for %{spec}") from None
    return handler(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    Integers for %d/%i are taken as 32-bit signed and for %u/%x/%X as 32-bit
    unsigned. A ``%`` followed by any other character produces ``%``.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        pieces.append(_convert(next(chars, ""), values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format and write to ``stream`` (standard output by default); return the characters written."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)