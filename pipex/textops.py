"""String helpers: splitting, searching, comparing, trimming and joining.

Searches return an index into the text, or None when nothing is found.
Functions that in C would fill a caller's buffer return the resulting
text together with the length they report.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional

NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: Optional[str], sep: str) -> Optional[list[str]]:
    """Split text on sep, dropping empty pieces; None gives None."""
    _single(sep)
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def find_char(text: Optional[str], char: str) -> Optional[int]:
    """Index of the first occurrence of char in text.

    Searching for NUL finds the end of the text, at index len(text).
    """
    _single(char)
    if text is None:
        return None
    if char == NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: Optional[str], char: str) -> Optional[int]:
    """Index of the last occurrence of char in text.

    Searching for NUL finds the end of the text, at index len(text).
    """
    _single(char)
    if text is None:
        return None
    if char == NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare_n(first: Optional[str], second: Optional[str], n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the first differing code points, 0 when
    equal. A missing string sorts before a present one.
    """
    _non_negative(n, "n")
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    for a, b in zip(first[:n].ljust(n, NUL), second[:n].ljust(n, NUL)):
        if a != b:
            return ord(a) - ord(b)
        if a == NUL:
            break
    return 0


def find_substring(
    haystack: Optional[str], needle: str, length: int
) -> Optional[int]:
    """Index of needle in the first length characters of haystack.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if haystack is None:
        return None
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def trim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters in charset from both ends of text."""
    if text is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def substring(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of text from start; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if text is None:
        return None
    return text[start : start + length]


def join(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as empty.

    Returns None only when both are missing.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the length of src; truncation happened
    when that length is at least size.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters including the terminator.

    Returns the resulting text and the length the whole result would have
    needed. When size does not exceed len(dst), dst is left as it is and
    the reported length is len(src) + size.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def map_chars(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from func(index, char) for every character."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def iter_chars(
    text: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call func(index, char) for every element of a mutable character sequence.

    A non-None result replaces the element in place.
    """
    if text is None or func is None:
        return
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement