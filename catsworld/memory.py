"""Byte-buffer helpers working on bytearray and bytes-like objects."""

from __future__ import annotations

from collections.abc import Sized


def _check_count(n: int, *buffers: Sized) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c in buf[:n], or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch."""
    _check_count(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest; return dest."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest, overlap-safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if src + n > len(buf) or dest + n > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of c; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf