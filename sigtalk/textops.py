"""String searching, comparison, copying and splitting helpers.

Positions are returned as indices into the string, with None where nothing
was found. Operations that fill a fixed-size C buffer return the resulting
string together with the length the C call would report.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, where
    the end of a string counts as code 0; returns 0 if they agree.
    """
    _non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. A match must lie wholly inside the
    first ``length`` characters.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the concatenation tried to
    create. When ``size`` is not larger than ``dst``, ``dst`` is unchanged
    and the reported length is ``len(src) + size``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Apply ``f(index, item)`` to each element of ``s`` in place.

    Where ``f`` returns something other than None, it replaces the element.
    """
    for index, item in enumerate(list(s)):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement