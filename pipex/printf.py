"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

_UINT32 = 1 << 32
_UINTPTR = 1 << 64


def _as_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _UINT32 >> 1 else value


def _digits(value: int, alphabet: str) -> str:
    base = len(alphabet)
    out = []
    while True:
        value, rest = divmod(value, base)
        out.append(alphabet[rest])
        if not value:
            break
    return "".join(reversed(out))


def to_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` as an unsigned 32-bit hexadecimal number, no prefix."""
    return _digits(n % _UINT32, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def pointer_repr(p: int) -> str:
    """Return the printed form of an address: ``(nil)`` for zero, else ``0x..``."""
    p %= _UINTPTR
    if p == 0:
        return "(nil)"
    return "0x" + _digits(p, _LOWER_DIGITS)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_signed(value: Any) -> str:
    return str(_as_int32(int(value)))


def _format_unsigned(value: Any) -> str:
    return str(int(value) % _UINT32)


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": lambda value: to_hex(int(value)),
    "X": lambda value: to_hex(int(value), upper=True),
    "p": lambda value: pointer_repr(int(value)),
}


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args``.

    Unknown conversions are dropped along with their character, and a lone
    trailing ``%`` produces nothing. Raises TypeError when arguments run out.
    """
    pieces = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERTERS:
            pieces.append(_CONVERTERS[spec](_take(values, spec)))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the expanded template to standard output; return its length."""
    text = format_string(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)