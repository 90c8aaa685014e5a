"""Searching and comparing byte sequences."""

from __future__ import annotations


def _check_length(name: str, data: bytes, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(data):
        raise ValueError(f"length {n} exceeds the {len(data)} bytes of {name}")


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c & 0xFF`` in ``data[:n]``, or None."""
    _check_length("data", data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length("a", a, n)
    _check_length("b", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0