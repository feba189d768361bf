"""Byte-buffer helpers: fill, copy, move, search, compare and zeroed allocation."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

_ALLOC_LIMIT = 4294967295


def _check_length(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def fill(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    fill(buf, 0, n)


def copy(dest: Optional[bytearray], src: Optional[BytesLike], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from the start of ``src`` to the start of ``dest``.

    Returns ``dest``; when both buffers are ``None`` nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src must be buffers")
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("region lies outside the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first ``value`` byte within the first ``n`` bytes, or ``None``."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they match, otherwise the difference of the first unequal bytes.
    """
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would exceed a 32-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > _ALLOC_LIMIT // count:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)