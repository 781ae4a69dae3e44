"""printf-style formatting with the conversions ``cspdiuxX%``.

A conversion specification is ``%`` followed by any of the flags
``#0-+ ``, an optional width, an optional ``.precision`` and one
conversion character. A ``%`` that does not start a complete, known
specification is written as a literal ``%``. Integers are treated as C
``int``/``unsigned int`` (32 bits) and pointers as 64-bit addresses.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from ftkit.numbers import atoi

FLAGS = "#0-+ "
CONVERSIONS = "cspdiuxX%"

_DIGITS = "0123456789"
_UINT_MASK = (1 << 32) - 1
_PTR_MASK = (1 << 64) - 1
_NULL_STR = "(null)"
_NULL_PTR = "(nil)"
_MISSING = object()


@dataclass
class FormatSpec:
    """A parsed conversion specification."""

    conversion: str
    alt_form: bool = False
    zero_padded: bool = False
    left_adjusted: bool = False
    space_flag: bool = False
    force_sign: bool = False
    width: int = 0
    precision: Optional[int] = None
    length: int = 0

    def apply_flag(self, flag: str) -> None:
        """Apply one flag character; later flags can override earlier ones."""
        if flag == "#":
            self.alt_form = True
        elif flag == "0":
            if not self.left_adjusted:
                self.zero_padded = True
        elif flag == "-":
            self.left_adjusted = True
            self.zero_padded = False
        elif flag == " ":
            self.space_flag = True
        elif flag == "+":
            self.space_flag = False
            self.force_sign = True
        else:
            raise ValueError(f"unknown flag {flag!r}")


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _spec_end(fmt: str, pos: int = 0) -> int:
    """Return the index where the conversion character should be."""
    pos = _skip(fmt, pos, FLAGS)
    pos = _skip(fmt, pos, _DIGITS)
    if pos < len(fmt) and fmt[pos] == ".":
        pos += 1
    return _skip(fmt, pos, _DIGITS)


def is_valid_spec(fmt: str) -> bool:
    """Return True if ``fmt`` (the text after ``%``) starts with a complete specification."""
    end = _spec_end(fmt)
    return end < len(fmt) and fmt[end] in CONVERSIONS


def parse_spec(fmt: str) -> FormatSpec:
    """Parse the specification at the start of ``fmt`` (the text after ``%``).

    ``length`` of the result is the number of characters consumed.
    Raises ValueError for an incomplete or unknown specification.
    """
    end = _spec_end(fmt)
    if end >= len(fmt):
        raise ValueError(f"incomplete conversion specification {fmt!r}")
    if fmt[end] not in CONVERSIONS:
        raise ValueError(f"unknown conversion {fmt[end]!r}")
    spec = FormatSpec(conversion=fmt[end], length=end + 1)
    pos = 0
    while fmt[pos] in FLAGS:
        spec.apply_flag(fmt[pos])
        pos += 1
    digits_end = _skip(fmt, pos, _DIGITS)
    if digits_end > pos:
        spec.width = atoi(fmt[pos:digits_end])
    pos = digits_end
    if fmt[pos] == ".":
        pos += 1
        digits_end = _skip(fmt, pos, _DIGITS)
        spec.precision = atoi(fmt[pos:digits_end])
    return spec


def _justify(spec: FormatSpec, body: str, length: int, zero: bool = False) -> str:
    pad = max(0, spec.width - length)
    if spec.left_adjusted:
        return body + " " * pad
    return ("0" if zero else " ") * pad + body


def _expect_int(spec: FormatSpec, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec.conversion} needs an integer, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _render_char(spec: FormatSpec, value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        ch = value
    else:
        ch = chr(_expect_int(spec, value) & 0xFF)
    return _justify(spec, ch, 1)


def _render_text(spec: FormatSpec, text: str) -> str:
    length = len(text)
    if spec.precision is not None and spec.precision < length:
        length = spec.precision
    visible = text[:length] if length >= 0 else text
    return _justify(spec, visible, length)


def _render_str(spec: FormatSpec, value: Any) -> str:
    if value is None:
        if spec.precision is not None and 0 <= spec.precision < len(_NULL_STR):
            return " " * max(0, spec.width)
        return _render_text(spec, _NULL_STR)
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return _render_text(spec, value.split("\0", 1)[0])


def _precision_value(spec: FormatSpec) -> int:
    return spec.precision if spec.precision is not None else 0


def _zero_fill(spec: FormatSpec, length: int) -> bool:
    return (
        not spec.left_adjusted
        and spec.precision is None
        and spec.zero_padded
        and spec.width > length
    )


def _render_ptr(spec: FormatSpec, value: Any) -> str:
    addr = 0 if value is None else _expect_int(spec, value) & _PTR_MASK
    if addr == 0:
        return _justify(spec, _NULL_PTR, len(_NULL_PTR))
    digits = format(addr, "x")
    prefix = "+" if spec.force_sign else " " if spec.space_flag else ""
    prefix += "0x"
    length = max(_precision_value(spec), len(digits)) + len(prefix)
    if _zero_fill(spec, length):
        length = spec.width
    body = prefix + digits.rjust(length - len(prefix), "0")
    return _justify(spec, body, length)


def _render_int(spec: FormatSpec, value: Any) -> str:
    n = _to_int32(_expect_int(spec, value))
    num = abs(n)
    digits = str(num)
    length = max(_precision_value(spec), len(digits))
    if spec.precision == 0 and num == 0:
        length = 0
    if n < 0:
        sign = "-"
    elif spec.force_sign:
        sign = "+"
    elif spec.space_flag:
        sign = " "
    else:
        sign = ""
    if sign:
        length += 1
    if _zero_fill(spec, length):
        length = spec.width
    body = digits.rjust(length, "0")[-length:] if length else ""
    if sign:
        body = sign + body[1:]
    return _justify(spec, body, length)


def _render_unsigned(spec: FormatSpec, value: Any) -> str:
    num = _expect_int(spec, value) & _UINT_MASK
    digits = str(num)
    length = max(_precision_value(spec), len(digits))
    zero = spec.zero_padded and spec.precision is None
    if spec.precision == 0 and num == 0:
        length = 0
        body = ""
    else:
        body = digits.rjust(length, "0")
    return _justify(spec, body, length, zero)


def _render_hex(spec: FormatSpec, value: Any) -> str:
    x = _expect_int(spec, value) & _UINT_MASK
    conv = spec.conversion
    digits = format(x, conv)
    length = max(_precision_value(spec), len(digits))
    alt = spec.alt_form and x != 0
    if alt:
        length += 2
    empty = spec.precision == 0 and x == 0
    if empty:
        length = 0
    if _zero_fill(spec, length):
        length = spec.width
    if empty:
        body = ""
    else:
        body = digits.rjust(length, "0")
        if alt:
            body = "0" + conv + body[2:]
    return _justify(spec, body, length)


_RENDERERS = {
    "c": _render_char,
    "s": _render_str,
    "p": _render_ptr,
    "d": _render_int,
    "i": _render_int,
    "u": _render_unsigned,
    "x": _render_hex,
    "X": _render_hex,
}


def _render(spec: FormatSpec, args: Iterator[Any]) -> str:
    if spec.conversion == "%":
        return "%"
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return _RENDERERS[spec.conversion](spec, value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each specification replaced by the next argument.

    Raises ValueError when the format ends inside a specification and
    TypeError when the arguments run out or do not fit a conversion.
    Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    out: list[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        pos += 1
        if ch != "%":
            out.append(ch)
            continue
        end = _spec_end(fmt, pos)
        if end >= len(fmt):
            raise ValueError(f"incomplete conversion specification at index {pos - 1}")
        if fmt[end] not in CONVERSIONS:
            out.append("%")
            continue
        spec = parse_spec(fmt[pos:])
        pos += spec.length
        out.append(_render(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)