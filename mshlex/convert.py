"""Conversions between text and numbers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _skip_space_and_sign(text: str) -> tuple[int, int]:
    """Return (position after leading blanks and sign, sign)."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return pos, sign


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text without digits gives 0. The result wraps like a
    32-bit signed integer.
    """
    pos, sign = _skip_space_and_sign(text)
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = _wrap_int32(result * 10 + (ord(text[pos]) - ord("0")))
        pos += 1
    return _wrap_int32(sign * result)


def atodbl(text: str) -> float:
    """Parse a decimal number with an optional fractional part.

    Leading whitespace and one sign are accepted. Characters are not
    validated: every character before the first '.' adds to the integer
    part and every character after it to the fraction.
    """
    pos, sign = _skip_space_and_sign(text)
    number = 0.0
    while pos < len(text) and text[pos] != ".":
        number = number * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    if pos < len(text) and text[pos] == ".":
        pos += 1
    divisor = 10.0
    for ch in text[pos:]:
        number += (ord(ch) - ord("0")) / divisor
        divisor *= 10
    return number * sign


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def safe_atoi(text: str) -> int:
    """Parse ``text`` strictly as a 32-bit signed decimal integer.

    One optional sign followed by digits only; no whitespace. Raises
    ValueError when the text is empty, has other characters, or is out of
    range.
    """
    body = text
    sign = 1
    if body[:1] in ("+", "-") and body:
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not body:
        raise ValueError(f"not an integer: {text!r}")
    limit = INT_MAX if sign == 1 else -INT_MIN
    result = 0
    for ch in body:
        if not "0" <= ch <= "9":
            raise ValueError(f"not an integer: {text!r}")
        result = result * 10 + (ord(ch) - ord("0"))
        if result > limit:
            raise ValueError(f"integer out of range: {text!r}")
    return sign * result