"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from .numbers import itoa


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char(char: str, fd: int) -> int:
    """Write one character to fd; return the number of bytes written."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _write_all(fd, char.encode())


def put_str(text: str, fd: int) -> int:
    """Write text to fd; return the number of bytes written."""
    return _write_all(fd, text.encode())


def put_endl(text: str, fd: int) -> int:
    """Write text followed by a newline to fd."""
    return _write_all(fd, (text + "\n").encode())


def put_nbr(number: int, fd: int) -> int:
    """Write a 32-bit signed integer in decimal to fd."""
    return _write_all(fd, itoa(number).encode())