"""Byte-buffer operations on bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within n bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare n bytes of a and b; return -1, 0 or 1."""
    _check_count(n, a, b)
    left, right = bytes(a[:n]), bytes(b[:n])
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def memcpy(dest, src, n: int):
    """Copy n bytes from src into the start of dest and return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src into dest, safe when the two overlap; return dest."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest