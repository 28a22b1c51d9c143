"""Conversions between integers and their text representations."""

from __future__ import annotations

from collections.abc import Iterable

from webserv.chars import is_digit, is_space, to_upper

HEX_UPPER = "0123456789ABCDEF"
HEX_LOWER = "0123456789abcdef"
DECIMAL = "0123456789"

INT_MAX = 2147483647
INT_MIN = -2147483648


def _wrap_int32(value: int) -> int:
    """Reduce a value to a signed 32-bit integer, wrapping on overflow."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def _skip_sign(text: str) -> tuple[int, int]:
    """Skip leading whitespace and one optional sign; return (sign, position)."""
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return sign, pos


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``, as C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A string with no digits yields 0. The result wraps to 32 bits.
    """
    sign, pos = _skip_sign(text)
    number = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        number = number * 10 + sign * (ord(ch) - ord("0"))
    return _wrap_int32(number)


def atoi_base(text: str, base: int) -> int:
    """Parse a leading integer whose digits are 0-9 and A-F in either case.

    Every such character is taken as a digit whatever ``base`` is; its value
    is multiplied into the result using ``base``. The result wraps to 32 bits.
    """
    sign, pos = _skip_sign(text)
    number = 0
    for ch in text[pos:]:
        if is_digit(ch):
            digit = ord(ch) - ord("0")
        elif "A" <= to_upper(ch) <= "F":
            digit = ord(to_upper(ch)) - ord("A") + 10
        else:
            break
        number = number * base + sign * digit
    return _wrap_int32(number)


def exceeds_int_limits(text: str) -> bool:
    """Tell whether a string of digits, optionally led by '-', is outside int range.

    Leading zeros are ignored when counting digits; a ten-digit value is then
    compared with the limit starting right after the sign.
    """
    negative = text.startswith("-")
    pos = 1 if negative else 0
    while pos < len(text) and text[pos] == "0":
        pos += 1
    length = len(text) - pos
    if length > 10:
        return True
    if length == 10:
        if negative:
            return text[1:11] > "2147483648"
        return text[:10] > "2147483647"
    return False


def atoi_secure(word: str | None) -> int:
    """Strictly parse ``word`` as an int.

    Only an optional leading '-' followed by one or more digits is accepted;
    '+' and whitespace are not. Raises ValueError otherwise, or when the
    value does not fit a signed 32-bit int.
    """
    if word is None:
        raise ValueError("no number given")
    digits = word[1:] if word.startswith("-") else word
    if not digits:
        raise ValueError(f"not a number: {word!r}")
    if not all(ch in DECIMAL for ch in digits):
        raise ValueError(f"not a number: {word!r}")
    if exceeds_int_limits(word):
        raise ValueError(f"number out of int range: {word!r}")
    return atoi(word)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with '-' when negative."""
    return str(n)


def number_to_base(n: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError("number must not be negative")
    if n == 0:
        return "0"
    out = []
    while n > 0:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal representation of a non-negative integer, no prefix."""
    return number_to_base(n, HEX_UPPER if upper else HEX_LOWER)


def to_dec(n: int) -> str:
    """Decimal representation of a non-negative integer."""
    return number_to_base(n, DECIMAL)


def min_int_array(values: Iterable[int]) -> int:
    """Smallest of ``values``, or -999 when there are none."""
    return min(values, default=-999)