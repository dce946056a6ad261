"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Optional

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def format_number_base(nb: int, base: int, upper: bool = False) -> str:
    """Return non-negative ``nb`` written in ``base`` (2 to 16)."""
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    if nb < 0:
        raise ValueError("number must not be negative")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        nb, rem = divmod(nb, base)
        out.append(digits[rem])
        if nb == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return ``address`` as ``0x`` followed by hex, or ``(nil)`` for null."""
    if not address:
        return "(nil)"
    return "0x" + format_number_base(address & 0xFFFFFFFFFFFFFFFF, 16)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return "%" + spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    unsigned = int(value) & 0xFFFFFFFF
    if spec == "u":
        return format_number_base(unsigned, 10)
    return format_number_base(unsigned, 16, upper=spec == "X")


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    An unknown conversion is written back as it is. Raises TypeError when
    ``fmt`` is None or there are too few arguments, and ValueError when
    ``fmt`` ends in a lone ``%``.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)