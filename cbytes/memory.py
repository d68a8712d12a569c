"""Byte-buffer operations on mutable buffers such as bytearray and memoryview.

Byte counts must lie between zero and the length of the buffers involved;
anything else raises ValueError. Byte values are taken modulo 256.
"""

from __future__ import annotations

from typing import Optional

from collections.abc import Sequence


def _check(buf: Sequence[int], n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"byte count {n} exceeds {name} length {len(buf)}")


def memset(buf, value: int, n: int):
    """Set the first n bytes of buf to value and return buf."""
    _check(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy the first n bytes of src into dest and return dest."""
    _check(dest, n, "destination")
    _check(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src into dest, correct even when the two overlap."""
    _check(dest, n, "destination")
    _check(src, n, "source")
    if n:
        # Taking a snapshot first makes overlapping views behave correctly.
        dest[:n] = bytes(src[:n])
    return dest


def memchr(data, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within the first n bytes, or None."""
    _check(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, or 0."""
    _check(a, n, "first buffer")
    _check(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)