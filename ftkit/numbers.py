"""Parsing and formatting of numbers in text."""

from __future__ import annotations

import re

from ftkit.chars import is_digit

_LONG_MAX = 2**63 - 1
_INT_BITS = 32
_ATOI_SPACES = " \t\n\v\f\r"
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def _to_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _split_sign(text: str) -> tuple[int, str]:
    if text[:1] in ("+", "-"):
        return (-1 if text[0] == "-" else 1), text[1:]
    return 1, text


def _leading_digits(text: str) -> str:
    end = 0
    for ch in text:
        if not is_digit(ch):
            break
        end += 1
    return text[:end]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace and one sign are accepted and parsing stops at the
    first non-digit. A magnitude beyond the 64-bit signed range gives -1
    (or 0 when negative); otherwise the value wraps to a 32-bit int.
    """
    sign, rest = _split_sign(text.lstrip(_ATOI_SPACES))
    digits = _leading_digits(rest)
    magnitude = int(digits) if digits else 0
    if magnitude > _LONG_MAX:
        return 0 if sign == -1 else -1
    return _to_int32(magnitude * sign)


def atof(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Only spaces are skipped before the optional sign; exponents are not
    understood and parsing stops at the first unexpected character.
    """
    sign, rest = _split_sign(text.lstrip(" "))
    integer = _leading_digits(rest)
    rest = rest[len(integer):]
    value = 0.0
    for ch in integer:
        value = value * 10 + (ord(ch) - ord("0"))
    if rest.startswith("."):
        scale = 10
        for ch in _leading_digits(rest[1:]):
            value += (ord(ch) - ord("0")) / scale
            scale *= 10
    return value * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits


def is_number(text: str) -> bool:
    """Return True if ``text`` is a plain signed decimal, e.g. ``-1.5`` or ``.5``."""
    return _NUMBER_RE.fullmatch(text) is not None