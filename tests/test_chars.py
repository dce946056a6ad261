import string

import pytest

from mshlex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_not_digit(ch):
    assert is_alpha(ch) is True
    assert is_digit(ch) is False
    assert is_alnum(ch) is True


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False
    assert is_alnum(ch) is True


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(0, 256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_digit("٣") is False


def test_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_matches_bounds():
    printable = [code for code in range(256) if is_print(code)]
    assert printable[0] == 32
    assert printable[-1] == 126
    assert len(printable) == 126 - 32 + 1
    assert is_print("\t") is False


def test_case_round_trip_for_letters():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch
        assert to_upper(ch) in string.ascii_uppercase
    for ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch


def test_case_conversion_keeps_type():
    assert to_upper("a") == "A"
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_non_letters_unchanged():
    for ch in string.digits + string.punctuation + " ":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)