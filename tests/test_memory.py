import pytest

from mshlex.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_same_buffer():
    buf = bytearray(b"abcdef")
    out = memset(buf, ord("x"), 3)
    assert out is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == b"def"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_bzero():
    buf = bytearray(b"hello")
    bzero(buf, 5)
    assert buf == bytearray(5)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    memcpy(dst, b"abc", 3)
    assert dst[:3] == b"abc"
    assert dst[3:] == b"..."
    assert len(dst) == 6


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"", 0, 0) is None


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_antisymmetric():
    assert memcmp(b"\x00\xff", b"\x00\x01", 2) == -memcmp(b"\x00\x01", b"\x00\xff", 2)


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_sizes():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)