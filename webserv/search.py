"""Searching and comparing within strings and byte sequences."""

from __future__ import annotations

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _byte_value(c: int | bytes) -> int:
    """Reduce a byte given as int or one-byte bytes to 0..255."""
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    return c & 0xFF


def _check_length(data: bytes, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(data):
        raise ValueError(f"length {n} exceeds data of {len(data)} bytes")


def find_char(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    A NUL character matches the end of the string, so its index is
    ``len(text)``.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    pos = text.find(c)
    return None if pos < 0 else pos


def rfind_char(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    A NUL character matches the end of the string, so its index is
    ``len(text)``.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    pos = text.rfind(c)
    return None if pos < 0 else pos


def _diff_at(s1: str, s2: str, i: int) -> int:
    a = ord(s1[i]) if i < len(s1) else 0
    b = ord(s2[i]) if i < len(s2) else 0
    return a - b


def compare(s1: str, s2: str) -> int:
    """Compare two strings; zero when equal, else the difference of the first
    differing characters' codes (the end of a string counts as code 0)."""
    for i, (a, b) in enumerate(zip(s1, s2)):
        if a != b:
            return ord(a) - ord(b)
    return _diff_at(s1, s2, min(len(s1), len(s2)))


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n <= 0:
        return 0
    return compare(s1[:n], s2[:n])


def find_in(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    if not needle:
        return 0
    limit = min(length, len(haystack))
    pos = haystack.find(needle, 0, limit)
    return None if pos < 0 else pos


def count_char(text: str, c: str, n: int) -> int:
    """Number of ``c`` among the first ``n`` characters of ``text``."""
    _single_char(c)
    if n <= 0:
        return 0
    return text[:n].count(c)


def find_byte(data: bytes, c: int | bytes, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) within the
    first ``n`` bytes of ``data``, or None."""
    _check_length(data, n)
    pos = data.find(bytes([_byte_value(c)]), 0, n)
    return None if pos < 0 else pos


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``; zero when equal,
    else the difference of the first differing bytes as unsigned values."""
    _check_length(a, n)
    _check_length(b, n)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0