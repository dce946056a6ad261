"""String helpers with C-library semantics expressed in Python terms.

Searches return an index or None instead of a pointer. Positions past the
end of a string behave like the terminating NUL of a C string.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise a one-character string or a character code to a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError("expected a one-character string or an integer code")
    return chr(c & 0xFF)


def _at(s: str, i: int) -> str:
    """Return the character at ``i``, or NUL past the end."""
    return s[i] if i < len(s) else _NUL


def _require(*values) -> None:
    if any(v is None for v in values):
        raise TypeError("argument must not be None")


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the full length of ``src``, so a result
    length of at least ``size`` signals truncation.
    """
    _require(src)
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so that the result fits in ``size`` slots.

    One slot is reserved for the terminator. Returns the resulting text and
    the length the full concatenation would have had. When ``size`` is not
    larger than ``dst``, ``dst`` is left as it is and ``size + len(src)`` is
    returned as the length.
    """
    _require(dst, src)
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    _require(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    _require(s)
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the code difference at the first mismatch."""
    _require(a, b)
    for i in range(max(len(a), len(b))):
        x, y = _at(a, i), _at(b, i)
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _require(a, b)
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        x, y = _at(a, i), _at(b, i)
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. Returns None when not found.
    """
    _require(big, little)
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index == -1 else index


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    _require(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    _require(a, b)
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    _require(s, charset)
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    _require(s)
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    _require(s, func)
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for every character of a mutable sequence.

    A non-None return value replaces the character in place. The sequence
    itself is returned.
    """
    _require(s, func)
    for i, ch in enumerate(list(s)):
        replacement = func(i, ch)
        if replacement is not None:
            s[i] = replacement
    return s