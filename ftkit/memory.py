"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

_SIZE_MAX = 2**64 - 1


def _check_span(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_span(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises MemoryError when the total does not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise MemoryError(f"allocation of {nmemb} x {size} bytes overflows")
    return bytearray(total)


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:n]``, or None."""
    _check_span(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_span(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_span(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(n, len(buffer) - dest, len(buffer) - src)
    if dest != src and n:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer