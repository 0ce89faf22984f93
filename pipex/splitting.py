"""Splitting strings into words."""

from __future__ import annotations

from itertools import groupby

_SEPARATORS = frozenset("\t\n\v\f\r ,/")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces.

    Raises ValueError if ``sep`` is not exactly one character.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def is_word_char(c: str) -> bool:
    """Return whether ``c`` belongs to a word for :func:`charset_split`.

    Whitespace, commas and slashes separate words; everything else is part
    of one.
    """
    return c not in _SEPARATORS


def charset_split(text: str) -> list[str]:
    """Split ``text`` into maximal runs of word characters."""
    return [
        "".join(run)
        for is_word, run in groupby(text, key=is_word_char)
        if is_word
    ]