"""Formatted output to streams with a small printf-style conversion set.

Supported conversions: ``%%``, ``%c``, ``%s``, ``%p``, ``%d``, ``%i``,
``%u``, ``%x`` and ``%X``. An unknown conversion letter produces no output,
and a lone ``%`` at the end of the format ends it.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any, Optional, TextIO

from pipex.chars import CharLike
from pipex.conversions import INT_BITS, LONG_BITS, _wrap_signed, itoa, utoa

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MODULUS = 1 << INT_BITS
_ULONG_MODULUS = 1 << LONG_BITS


def _char(value: CharLike) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _string(value: Optional[str]) -> str:
    return NULL_STRING if value is None else str(value)


def _pointer(value: Optional[int]) -> str:
    address = 0 if value is None else operator.index(value) % _ULONG_MODULUS
    if address == 0:
        return NULL_POINTER
    return f"0x{address:x}"


def _signed(value: int) -> str:
    return itoa(_wrap_signed(operator.index(value), INT_BITS))


def _unsigned(value: int) -> str:
    return utoa(value)


def _hex(value: int, upper: bool) -> str:
    number = operator.index(value) % _UINT_MODULUS
    return f"{number:X}" if upper else f"{number:x}"


_CONVERTERS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": lambda value: _hex(value, upper=False),
    "X": lambda value: _hex(value, upper=True),
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERTERS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string at %{spec}"
            ) from None
        yield convert(value)


def format_string(fmt: Optional[str], *args: Any) -> str:
    """Expand ``fmt`` with ``args``; a missing format gives an empty string."""
    if fmt is None:
        return ""
    return "".join(_pieces(fmt, args))


def dprintf(stream: TextIO, fmt: Optional[str], *args: Any) -> int:
    """Write the expanded format to ``stream`` and return the characters written."""
    text = format_string(fmt, *args)
    if text:
        stream.write(text)
    return len(text)


def put_str(stream: TextIO, s: Optional[str]) -> None:
    """Write ``s`` to ``stream``; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl(stream: TextIO, s: Optional[str]) -> None:
    """Write ``s`` followed by a newline; the newline is written even without ``s``."""
    put_str(stream, s)
    stream.write("\n")


def put_nbr(stream: TextIO, n: int) -> None:
    """Write the decimal form of ``n`` taken as a 32-bit ``int``."""
    stream.write(_signed(n))