"""Formatted output with printf-style conversion specifications.

Supported conversions are ``c s p d i u x X %``. Each specification has the
shape ``%[flags][width][.precision]conversion`` where the flags are any of
``-0# +``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from webserv.convert import INT_MAX, to_dec, to_hex

FLAGS = "-0# +"
SPECIFIERS = "cspdiuxX%"

_UINT_MASK = 0xFFFFFFFF


@dataclass
class ConversionSpec:
    """One parsed conversion specification.

    ``precision`` is None when no '.' was given; a bare '.' means 0.
    """

    left_align: bool = False
    zero_pad: bool = False
    alt_form: bool = False
    space_positive: bool = False
    plus_positive: bool = False
    width: int = 0
    precision: int | None = None
    specifier: str = ""


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and fmt[pos] in "0123456789":
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def parse_spec(fmt: str, pos: int) -> tuple[ConversionSpec, int]:
    """Parse the specification starting at ``pos``, just after a '%'.

    Returns the specification and the position after its conversion
    character. Raises ValueError when the format ends before a conversion
    character.
    """
    spec = ConversionSpec()
    while pos < len(fmt) and fmt[pos] in FLAGS:
        flag = fmt[pos]
        spec.left_align = spec.left_align or flag == "-"
        spec.zero_pad = spec.zero_pad or flag == "0"
        spec.alt_form = spec.alt_form or flag == "#"
        spec.space_positive = spec.space_positive or flag == " "
        spec.plus_positive = spec.plus_positive or flag == "+"
        pos += 1
    spec.width, pos = _read_number(fmt, pos)
    if pos < len(fmt) and fmt[pos] == ".":
        spec.precision, pos = _read_number(fmt, pos + 1)
    if pos >= len(fmt):
        raise ValueError("incomplete conversion specification at end of format")
    spec.specifier = fmt[pos]
    return spec, pos + 1


def _pad(body: str, length: int, spec: ConversionSpec) -> str:
    """Pad ``body`` with spaces up to the field width, counting it as ``length``."""
    pad = spec.width - length if spec.width > length else 0
    if spec.left_align:
        return body + " " * pad
    return " " * pad + body


def _number(
    spec: ConversionSpec, value: int, digits: str, head: str, hex_prefix: bool
) -> str:
    if spec.precision == 0 and value == 0:
        digits = ""
    length = len(digits)
    zeros = 0
    if spec.precision is not None and spec.precision > length:
        zeros = spec.precision - length
    if not hex_prefix:
        length += len(head)
    if (
        spec.zero_pad
        and not spec.left_align
        and spec.precision is None
        and spec.width > length
    ):
        zeros = spec.width - length
    if hex_prefix:
        if spec.precision is None and spec.zero_pad:
            zeros = min(zeros - 2, 0)
        length += len(head)
    total = zeros + length
    return _pad(head + "0" * max(zeros, 0) + digits, total, spec)


def _signed(spec: ConversionSpec, arg: int) -> str:
    value = arg & _UINT_MASK
    if value > INT_MAX:
        value -= _UINT_MASK + 1
    if value < 0:
        sign = "-"
    elif spec.plus_positive:
        sign = "+"
    elif spec.space_positive:
        sign = " "
    else:
        sign = ""
    magnitude = abs(value)
    return _number(spec, magnitude, to_dec(magnitude), sign, hex_prefix=False)


def _unsigned(spec: ConversionSpec, arg: int) -> str:
    value = arg & _UINT_MASK
    return _number(spec, value, to_dec(value), "", hex_prefix=False)


def _hex(spec: ConversionSpec, arg: int) -> str:
    value = arg & _UINT_MASK
    upper = spec.specifier == "X"
    digits = to_hex(value, upper)
    if spec.alt_form and value != 0:
        return _number(spec, value, digits, "0" + spec.specifier, hex_prefix=True)
    return _number(spec, value, digits, "", hex_prefix=False)


def _char(spec: ConversionSpec, arg: Any) -> str:
    if isinstance(arg, int):
        ch = chr(arg & 0xFF)
    elif isinstance(arg, str) and len(arg) == 1:
        ch = arg
    else:
        raise TypeError(f"%c needs a character or an int, got {arg!r}")
    return _pad(ch, 1, spec)


def _string(spec: ConversionSpec, arg: str | None) -> str:
    text = "(null)" if arg is None else arg
    if not isinstance(text, str):
        raise TypeError(f"%s needs a string, got {type(text).__name__}")
    if spec.precision is not None and len(text) > spec.precision:
        text = text[: spec.precision]
    return _pad(text, len(text), spec)


def _pointer(spec: ConversionSpec, arg: int | None) -> str:
    address = 0 if arg is None else arg
    if address < 0:
        raise ValueError("an address must not be negative")
    body = "0x" + to_hex(address)
    return _pad(body, len(body), spec)


def _next_arg(args: Iterator[Any], spec: ConversionSpec) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for conversion %{spec.specifier}"
        ) from None


def _render(spec: ConversionSpec, args: Iterator[Any]) -> str:
    conv = spec.specifier
    if conv == "%":
        return _pad("%", 1, spec)
    if conv not in SPECIFIERS:
        return ""
    arg = _next_arg(args, spec)
    if conv == "c":
        return _char(spec, arg)
    if conv == "s":
        return _string(spec, arg)
    if conv == "p":
        return _pointer(spec, arg)
    if not isinstance(arg, int):
        raise TypeError(f"%{conv} needs an int, got {type(arg).__name__}")
    if conv in "di":
        return _signed(spec, arg)
    if conv == "u":
        return _unsigned(spec, arg)
    return _hex(spec, arg)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with every conversion specification replaced.

    Unknown conversion characters produce nothing and take no argument.
    Raises TypeError when arguments run out.
    """
    remaining = iter(args)
    parts = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1)
        parts.append(_render(spec, remaining))
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)


def print_ints(values: Iterable[int], file: TextIO | None = None) -> None:
    """Write each integer on its own line."""
    for value in values:
        printf("%i\n", value, file=file)


def print_words(words: Iterable[str], file: TextIO | None = None) -> None:
    """Write the words one after another, then a newline."""
    for word in words:
        printf("%s", word, file=file)
    printf("\n", file=file)


def print_words_nl(words: Iterable[str], file: TextIO | None = None) -> None:
    """Write each word on its own line."""
    for word in words:
        printf("%s\n", word, file=file)