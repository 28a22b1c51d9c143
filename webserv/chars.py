"""Single-character classification and case conversion for ASCII text."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _code(c: str) -> int:
    """Return the code point of a one-character string."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def is_alpha(c: str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str) -> bool:
    """True for an ASCII decimal digit."""
    _code(c)
    return c in _DIGITS


def is_alnum(c: str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str) -> bool:
    """True for a character in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: str) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return or space."""
    _code(c)
    return c in _WHITESPACE


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; other characters are unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return chr(code - ord("a") + ord("A"))
    return c


def to_lower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; other characters are unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return chr(code - ord("A") + ord("a"))
    return c


def str_is_numeric(text: str) -> bool:
    """True when every character is an ASCII digit; the empty string counts."""
    return all(ch in _DIGITS for ch in text)