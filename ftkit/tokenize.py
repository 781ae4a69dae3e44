"""Split a command line into whitespace-separated tokens.

Quoted sections and backslash escapes are kept inside a token, quotes and
backslashes included; nothing is unquoted.
"""

from __future__ import annotations

_BLANKS = " \t"
_QUOTES = "\"'"


def _quote_len(s: str, start: int) -> int:
    quote = s[start]
    end = s.find(quote, start + 1)
    if end < 0:
        return len(s) - start
    return end + 1 - start


def _token_len(s: str, start: int) -> int:
    i = start
    n = len(s)
    while i < n and s[i] not in _BLANKS:
        if s[i] in _QUOTES:
            i += _quote_len(s, i)
        if i < n and s[i] == "\\":
            i += 1
        if i < n:
            i += 1
    return i - start


def _skip_blanks(s: str, pos: int) -> int:
    while pos < len(s) and s[pos] in _BLANKS:
        pos += 1
    return pos


def _count_tokens(s: str) -> int:
    count = 0
    pos = 0
    while pos < len(s):
        pos = _skip_blanks(s, pos)
        count += 1
        if pos < len(s) and s[pos] in _QUOTES:
            pos += _quote_len(s, pos)
        pos += _token_len(s, pos)
    return count


def tokenize(s: str) -> list[str]:
    """Return the tokens of ``s``.

    Trailing blanks yield one final empty token, as the counting pass
    sees a token after them.
    """
    tokens = []
    pos = 0
    for _ in range(_count_tokens(s)):
        pos = _skip_blanks(s, pos)
        length = _token_len(s, pos)
        tokens.append(s[pos:pos + length])
        pos += length
    return tokens