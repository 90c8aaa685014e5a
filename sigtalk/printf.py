"""A small printf supporting the ``c s d i u x X p %`` conversions.

Integer conversions follow C argument passing: ``%d``/``%i`` wrap the value
to a signed 32-bit int, ``%u``/``%x``/``%X`` to an unsigned 32-bit int.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO

from sigtalk.numconv import INT_MIN, itoa

_UINT_RANGE = 2**32


def _require_int(spec: str, value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def format_hex(n: int, spec: str = "x") -> str:
    """Render a non-negative integer in hexadecimal.

    ``spec`` is ``"x"`` for lowercase digits or ``"X"`` for uppercase.
    """
    if spec not in ("x", "X"):
        raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}")
    n = _require_int(spec, n)
    if n < 0:
        raise ValueError("cannot render a negative number in hexadecimal")
    return format(n, spec)


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x...``; a null address gives ``(nil)``."""
    if address is None or address == 0:
        return "(nil)"
    address = _require_int("p", address)
    if address < 0:
        raise ValueError("an address cannot be negative")
    return "0x" + format_hex(address, "x")


def _convert_char(spec: str, value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(spec, value) & 0xFF)


def _convert_string(spec: str, value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _convert_signed(spec: str, value: Any) -> str:
    wrapped = (_require_int(spec, value) - INT_MIN) % _UINT_RANGE + INT_MIN
    return itoa(wrapped)


def _convert_unsigned(spec: str, value: Any) -> str:
    return str(_require_int(spec, value) % _UINT_RANGE)


def _convert_hex(spec: str, value: Any) -> str:
    return format_hex(_require_int(spec, value) % _UINT_RANGE, spec)


def _convert_pointer(spec: str, value: Any) -> str:
    return format_pointer(value)


_CONVERSIONS: Dict[str, Callable[[str, Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_hex,
    "X": _convert_hex,
    "p": _convert_pointer,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise ValueError(f"unsupported conversion '%{spec}'")
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(convert(spec, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)