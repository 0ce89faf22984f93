"""Searching, comparing, slicing and trimming strings.

Functions that locate a character or substring return its index in the
string, or ``None`` when it is absent.
"""

from __future__ import annotations

from itertools import islice, zip_longest

_NUL = "\0"


def _check_length(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError("expected a single character")


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at index 0. Raises ValueError for a negative
    ``length``.
    """
    _check_length(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string. Raises ValueError for a
    negative ``start`` or ``length``.
    """
    _check_length(start, "start")
    _check_length(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    The end of a string compares as a NUL character. Returns the difference
    of the code points at the first mismatch, or 0 if none is found.
    Raises ValueError for a negative ``n``.
    """
    _check_length(n, "n")
    pairs = zip_longest(a, b, fillvalue=_NUL)
    for left, right in islice(pairs, n):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def strchr(text: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``text``.

    Searching for NUL finds the end of the string, ``len(text)``.
    """
    _check_char(c)
    index = text.find(c)
    if index >= 0:
        return index
    if c == _NUL:
        return len(text)
    return None


def strrchr(text: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``text``.

    Searching for NUL finds the end of the string, ``len(text)``.
    """
    _check_char(c)
    index = text.rfind(c)
    if index >= 0:
        return index
    if c == _NUL:
        return len(text)
    return None