"""String helpers: splitting, trimming, bounded copies, searches and comparisons."""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return c as a one-character string. An int is taken as a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    if c < 0:
        raise ValueError(f"character code must not be negative, got {c}")
    return chr(c)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split_words(text: str, sep: int | str) -> list[str]:
    """Split text on runs of sep, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def trim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset) if charset else text


def substring(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from index start.

    A start at or past the end gives the empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of the first needle lying wholly within haystack[:limit], or None.

    An empty needle is found at index 0.
    """
    _non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def find_char(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of c, or None.

    Searching for NUL finds the end of the text.
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def rfind_char(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of c, or None.

    Searching for NUL finds the end of the text.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch.

    A string that ends early compares as if followed by a NUL character.
    """
    _non_negative("n", n)
    for left, right in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
    return 0


def join(a: str, b: str) -> str:
    """Return the concatenation of a and b."""
    return a + b


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and the full length
    of src, so a truncation shows as a total of size or more.
    """
    _non_negative("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When dst already fills the buffer, dst is returned unchanged and the total
    is size plus the length of src.
    """
    _non_negative("size", size)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_indexed(text: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) for every character of text, in order."""
    for index, ch in enumerate(text):
        func(index, ch)