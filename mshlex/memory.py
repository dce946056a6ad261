"""Byte-buffer helpers working on bytearray and other buffers."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _check(buf, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(buf):
        raise IndexError(f"{what} is shorter than {n} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (low 8 bits)."""
    _check(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check(dst, n, "destination")
    _check(src, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check(buf, dst + n, "destination")
    _check(buf, src + n, "source")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memchr(buf: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first
    ``n`` bytes, or None."""
    _check(buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    differing pair, or 0 if equal."""
    _check(a, n, "first buffer")
    _check(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError("requested size overflows")
    return bytearray(total)