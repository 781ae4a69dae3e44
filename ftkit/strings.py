"""String helpers with C string-library semantics.

Positions are returned as indices instead of pointers. Where the C
functions would write into a caller's buffer, the new string is returned.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on runs of the character ``sep``, dropping empty words."""
    return [word for word in s.split(_char(sep)) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives ``len(s)``, the terminator's place.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Return the code difference at the first mismatch, or 0 if equal."""
    for i in range(max(len(a), len(b)) + 1):
        ca, cb = _code_at(a, i), _code_at(b, i)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    _non_negative("n", n)
    for i in range(n):
        ca, cb = _code_at(a, i), _code_at(b, i)
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    _non_negative("length", length)
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied string (at most ``size - 1`` characters, empty when
    ``size`` is 0) and the length of ``src``.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have
    had. When ``size`` is 0 or no larger than ``dst``, ``dst`` is left as is
    and the returned length is ``len(src) + size``.
    """
    _non_negative("size", size)
    if size == 0 or size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (s1 or "") + (s2 or "")


def substr(s: Optional[str], start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A missing string or a start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if s is None or start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: Optional[str]) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``.

    Without a charset the string is returned unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character.

    A NUL returned by ``func`` ends the result, as it would a C string.
    """
    mapped = "".join(func(i, ch) for i, ch in enumerate(s))
    return mapped.split("\0", 1)[0]


def striteri(
    s: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> MutableSequence[str]:
    """Call ``func(index, s)`` for each position of a mutable character sequence.

    ``func`` may change ``s[index]`` in place. The sequence is returned.
    """
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for i in range(len(s)):
        func(i, s)
    return s