"""Formatted output with a small printf-style conversion set.

Supported conversions: %c %s %p %d %i %u %x %X and %%. A '%' followed by
any other character, or ending the format, is written as it stands.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_CONVERSION = re.compile(r"%([cspdiuxX%])")

_INT_BITS = 32
_POINTER_BITS = 64


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return int(value)


def _signed32(value: int) -> int:
    span = 1 << _INT_BITS
    return (value + (span >> 1)) % span - (span >> 1)


def _unsigned32(value: int) -> int:
    return value & ((1 << _INT_BITS) - 1)


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & ((1 << _POINTER_BITS) - 1):x}"


def _conv_signed(value: Any) -> str:
    return str(_signed32(_as_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_unsigned32(_as_int(value, "u")))


def _conv_hex_lower(value: Any) -> str:
    return f"{_unsigned32(_as_int(value, 'x')):x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{_unsigned32(_as_int(value, 'X')):X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_signed,
    "i": _conv_signed,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def format_printf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    Integer conversions treat their argument as a 32-bit C int. Extra
    arguments are ignored; too few raise TypeError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    remaining: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        return _CONVERTERS[spec](value)

    return _CONVERSION.sub(replace, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: str, file: TextIO | None = None) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(file).write(c)


def put_str(s: str | None, file: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(file).write(s)


def put_endl(s: str | None, file: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes only the newline."""
    out = _target(file)
    put_str(s, out)
    out.write("\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write the decimal form of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _target(file).write(str(n))