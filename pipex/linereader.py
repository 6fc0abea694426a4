"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Data is read in chunks of buffer_size bytes. Bytes read past the end of
    a line are kept for the next call. Each line keeps its trailing newline.
    The final line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted.

        Read errors propagate as OSError.
        """
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)


def read_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of fd."""
    yield from LineReader(fd, buffer_size)