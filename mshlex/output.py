"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character (or the low byte of a character code)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError("expected a one-character string or an integer code")
    _target(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s``; None writes nothing."""
    if s:
        _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    if s is None:
        raise TypeError("s must be a string, not None")
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    _target(stream).write(str(int(n)))