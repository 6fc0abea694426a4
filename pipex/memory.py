"""Byte-buffer helpers: filling, zeroing, searching, comparing and copying.

Buffers that are written to must be mutable (bytearray or a writable
memoryview). Every length is checked against the buffers it applies to,
and going past the end raises ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"length {n} exceeds buffer of {len(buffer)} bytes"
            )


def zero(buffer: Buffer, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _check_length(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count}, {size}")
    return bytearray(count * size)


def mem_find(data: Optional[ReadableBuffer], byte: int, n: int) -> Optional[int]:
    """Index of the first byte equal to byte (taken modulo 256) in data[:n].

    Returns None when it is absent or data is None.
    """
    if data is None:
        return None
    _check_length(n, data)
    index = bytes(data[:n]).find(byte & 0xFF)
    return None if index < 0 else index


def mem_compare(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first n bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def mem_copy(
    dst: Optional[Buffer], src: Optional[ReadableBuffer], n: int
) -> Optional[Buffer]:
    """Copy n bytes from src to the start of dst and return dst.

    Returns None when both are None.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both dst and src are needed")
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def mem_move(
    buffer: Optional[Buffer], dst_offset: int, src_offset: int, n: int
) -> Optional[Buffer]:
    """Move n bytes within buffer from src_offset to dst_offset.

    The regions may overlap; the result is as if the source were copied
    out first. Returns the buffer, or None when it is None.
    """
    if buffer is None:
        return None
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dst_offset, src_offset) + n > len(buffer):
        raise ValueError(f"move of {n} bytes runs past the end of the buffer")
    buffer[dst_offset : dst_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def mem_set(buffer: Optional[Buffer], value: int, n: int) -> Optional[Buffer]:
    """Fill the first n bytes with value (taken modulo 256) and return buffer.

    Returns None when buffer is None.
    """
    if buffer is None:
        return None
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer