"""Integer parsing and formatting with fixed-width C integer semantics."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

INT_MIN = -2147483648
INT_MAX = 2147483647


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str) -> int:
    """Skip leading whitespace, read one optional sign, then leading digits."""
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def atoi(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed value.

    Leading whitespace is skipped and a single ``+`` or ``-`` is accepted.
    Parsing stops at the first non-digit; if there are no digits the result
    is 0. Values that do not fit wrap around as a 32-bit integer would.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse the leading integer of ``text`` as a 64-bit signed value."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer.

    Raises OverflowError if ``n`` does not fit in 32 bits.
    """
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)