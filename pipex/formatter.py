"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any, Optional

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_PIECE_PATTERN = re.compile(r"%(.)|(.)", re.DOTALL)


def format_hex(value: int, upper: bool = False) -> str:
    """Render a non-negative integer in hexadecimal without a prefix."""
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    return format(value, "X" if upper else "x")


def format_pointer(address: Optional[int]) -> str:
    """Render an address as 0x-prefixed hex, or (nil) for a null address."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address & _UINT64)


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    value &= _UINT32
    return value - 2**32 if value >= 2**31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda v: str(_int32(_require_int(v, "d"))),
    "i": lambda v: str(_int32(_require_int(v, "i"))),
    "u": lambda v: str(_require_int(v, "u") & _UINT32),
    "x": lambda v: format_hex(_require_int(v, "x") & _UINT32),
    "X": lambda v: format_hex(_require_int(v, "X") & _UINT32, upper=True),
    "p": lambda v: format_pointer(None if v is None else _require_int(v, "p")),
}


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_string(fmt: str, *args: Any) -> str:
    """Expand fmt with args and return the text.

    A '%' at the very end is kept literally; an unknown conversion after
    '%' produces nothing and consumes no argument.
    """
    values = iter(args)
    pieces = []
    for match in _PIECE_PATTERN.finditer(fmt):
        spec, literal = match.groups()
        if literal is not None:
            pieces.append(literal)
        elif spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(values)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded fmt to standard output; return the characters written."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)