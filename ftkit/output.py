"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from ftkit.numbers import itoa

CharLike = Union[str, int]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return bytes([c & 0xFF])


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to ``fd`` and return the bytes written.

    Descriptor 0 and negative descriptors are refused with ValueError.
    """
    if fd <= 0:
        raise ValueError(f"refusing to write to file descriptor {fd}")
    return os.write(fd, _char_bytes(c))


def putstr_fd(s: str, fd: int) -> int:
    """Write ``s`` to ``fd`` and return the bytes written."""
    return os.write(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> int:
    """Write ``s`` and a newline to ``fd``; return the bytes written."""
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``; return the bytes written."""
    return sum(putchar_fd(ch, fd) for ch in itoa(n))