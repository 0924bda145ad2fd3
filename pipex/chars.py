"""ASCII character classification and whole-string checks."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACES = frozenset("\t\n\v\f\r ")


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def is_spaces(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(c)
    return 0 <= code <= 0x10FFFF and chr(code) in _SPACES


def is_alpha(c: CharLike) -> int:
    """Return 1 for an ASCII upper-case letter, 2 for lower-case, 0 otherwise."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return 1
    if ord("a") <= code <= ord("z"):
        return 2
    return 0


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return bool(is_alpha(c)) or is_digit(c)


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, 32 to 126."""
    return 32 <= _code(c) <= 126


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def is_only_digits(s: str) -> bool:
    """True if every character of ``s`` is an ASCII digit (an empty string counts)."""
    return all(is_digit(ch) for ch in s)


def is_only_spaces(s: str) -> bool:
    """True if every character of ``s`` is whitespace (an empty string counts)."""
    return all(is_spaces(ch) for ch in s)


def contains(s: str, c: CharLike) -> bool:
    """True if the character ``c`` occurs in ``s``."""
    code = _code(c)
    return any(ord(ch) == code for ch in s)


def streq(s1: str | None, s2: str | None) -> bool:
    """True if both strings are exactly equal; a missing string equals only another."""
    if s1 is None or s2 is None:
        return s1 is None and s2 is None
    return s1 == s2