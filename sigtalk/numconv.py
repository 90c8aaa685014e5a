"""Conversions between text and 32-bit signed integers."""

from __future__ import annotations

import sys
from typing import TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, a single ``+`` or ``-`` is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    The result wraps to the signed 32-bit range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return _wrap_int32(sign * int("".join(digits)))


def itoa(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` in decimal to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = itoa(n)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)