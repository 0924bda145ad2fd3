"""Conversions between decimal text and integers of fixed C widths."""

from __future__ import annotations

import operator

from pipex.chars import is_digit, is_only_digits, is_spaces

INT_BITS = 32
LONG_BITS = 64
LLONG_MAX = 2**63 - 1
LLONG_MIN_TEXT = "-9223372036854775808"
_MAX_LONGLONG_TEXT_LEN = 20


def _wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's complement integer of ``bits`` width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_decimal(s: str) -> int:
    """Parse leading whitespace, an optional sign and a run of ASCII digits.

    Parsing stops at the first character that does not fit; text with no
    digits gives zero.
    """
    i = 0
    while i < len(s) and is_spaces(s[i]):
        i += 1
    sign = 1
    if i < len(s) and s[i] in "+-":
        if s[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(s) and is_digit(s[i]):
        i += 1
    digits = s[start:i]
    return sign * int(digits) if digits else 0


def atoi(s: str) -> int:
    """Read a decimal integer from the start of ``s`` as a 32-bit ``int``.

    Values out of range wrap around as two's complement.
    """
    return _wrap_signed(_parse_decimal(s), INT_BITS)


def atol(s: str) -> int:
    """Read a decimal integer from the start of ``s`` as a 64-bit signed size."""
    return _wrap_signed(_parse_decimal(s), LONG_BITS)


def atoll(s: str) -> int:
    """Read a decimal integer from the start of ``s`` as a 64-bit ``long long``."""
    return _wrap_signed(_parse_decimal(s), LONG_BITS)


def fits_in_longlong(s: str) -> bool:
    """True if ``s`` is an optionally signed run of digits within ``long long`` range.

    Text longer than 20 characters never fits, and a lone sign or an empty
    string is accepted.
    """
    if len(s) > _MAX_LONGLONG_TEXT_LEN:
        return False
    if s == LLONG_MIN_TEXT:
        return True
    digits = s[1:] if s[:1] in ("-", "+") else s
    if not is_only_digits(digits):
        return False
    return not digits or int(digits) <= LLONG_MAX


def itoa(n: int) -> str:
    """Decimal text of the integer ``n``, with a leading minus when negative."""
    return str(operator.index(n))


def utoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return str(operator.index(n) % (1 << INT_BITS))