import pytest

from mshlex.strings import (
    bounded_concat,
    bounded_copy,
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 6, 100])
def test_bounded_copy_truncates_to_size_minus_one(size):
    src = "hello"
    copied, total = bounded_copy(src, size)
    assert total == len(src)
    assert copied == src[: size - 1]
    assert len(copied) <= size - 1


def test_bounded_copy_zero_size_copies_nothing():
    assert bounded_copy("hello", 0) == ("", 5)


def test_bounded_copy_negative_size():
    with pytest.raises(ValueError):
        bounded_copy("hello", -1)


def test_bounded_concat_fits():
    text, total = bounded_concat("ab", "cd", 10)
    assert text == "ab" + "cd"
    assert total == 4


def test_bounded_concat_truncates():
    dst, src, size = "ab", "cdef", 4
    text, total = bounded_concat(dst, src, size)
    assert len(text) == size - 1
    assert text == (dst + src)[: size - 1]
    assert total == len(dst) + len(src)


def test_bounded_concat_size_not_larger_than_dst():
    text, total = bounded_concat("abc", "de", 2)
    assert text == "abc"
    assert total == 2 + len("de")


def test_strchr_finds_first():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_accepts_code():
    assert strchr("hello", ord("e")) == 1


def test_strrchr_finds_last():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1 :]
    assert strrchr(s, "q") is None
    assert strrchr(s, "\0") == len(s)


def test_strcmp_equal_and_order():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("abd", "abc") > 0


def test_strcmp_prefix():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strncmp_limits_comparison():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) == ord("x") - ord("y")
    assert strncmp("a", "b", 0) == 0


def test_strncmp_stops_at_end_of_both():
    assert strncmp("ab", "ab", 10) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


def test_strnstr_found_within_length():
    big, little = "hello world", "world"
    index = strnstr(big, little, len(big))
    assert big[index : index + len(little)] == little


def test_strnstr_not_within_length():
    big = "hello world"
    assert strnstr(big, "world", big.index("world") + 2) is None
    assert strnstr(big, "xyz", len(big)) is None


def test_strnstr_empty_needle():
    assert strnstr("hello", "", 0) == 0


def test_substr_basic_and_clipped():
    s = "hello"
    assert substr(s, 1, 3) == s[1:4]
    assert substr(s, 2, 100) == s[2:]
    assert substr(s, 5, 2) == ""
    assert substr(s, 99, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    a, b = "foo", "bar"
    joined = strjoin(a, b)
    assert joined.startswith(a) and joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxhiyx", "xy") == "hi"
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim("xxxx", "x") == ""


def test_split_drops_empty_pieces():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_invariant():
    s = ",,one,two,,three,"
    words = split(s, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert ",".join(words) == s.strip(",").replace(",,", ",")


def test_strmapi_passes_index():
    s = "abc"
    result = strmapi(s, lambda i, ch: ch * (i + 1))
    assert result == "a" + "bb" + "ccc"


def test_strmapi_none_func():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_modifies_in_place():
    chars = list("abcd")
    result = striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result is chars
    assert "".join(chars) == "AbCd"