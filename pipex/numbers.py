"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

from typing import Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \n\v\t\f\r"
_DIGITS = "0123456789"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: Optional[str]) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is honoured and digits
    are read until the first non-digit. No digits gives 0, as does None.
    The result wraps around like a 32-bit signed integer.
    """
    if text is None:
        return 0
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        result = _wrap32(result * 10 + _DIGITS.index(char))
    return _wrap32(result * sign)


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)