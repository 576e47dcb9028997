import pytest

from raycub.textutil import (
    atoi,
    flip,
    itoa,
    split,
    strcmp,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_atoi_itoa_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_matches_str():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_overflow_values():
    assert atoi("2147483648") == -1
    assert atoi("-2147483649") == 0
    assert atoi("99999999999999999999") == -1


def test_atoi_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_split_drops_empty_pieces():
    assert split(",,a,,bc,", ",") == ["a", "bc"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_join_round_trip():
    parts = ["220", "100", "0"]
    assert split(",".join(parts), ",") == parts


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("  x y  ", " ") == "x y"
    assert strtrim("xxabcxx", "x") == "abc"
    assert strtrim("    ", " ") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim(" abc ", "") == " abc "


def test_strnstr_finds_within_length():
    text = "Foo Bar Baz"
    assert strnstr(text, "Bar", len(text)) == text.index("Bar")
    assert strnstr(text, "Bar", 6) == -1
    assert strnstr(text, "", 0) == 0
    assert strnstr(text, "Qux", len(text)) == -1


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


@pytest.mark.parametrize("text", ["", "a", "abc", "abcde", "racecar1"[:7]])
def test_flip_odd_or_trivial_is_reversal(text):
    if len(text) % 2 == 1 or len(text) == 0:
        assert flip(text) == text[::-1]


def test_flip_even_keeps_center_pair():
    result = flip("abcd")
    assert result == "dbca"
    assert flip("ab") == "ab"


def test_flip_preserves_characters():
    text = "abcdefgh"
    assert sorted(flip(text)) == sorted(text)


def test_strcmp_sign_and_equality():
    assert strcmp("--save", "--save") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_antisymmetric():
    assert strcmp("hello", "help") == -strcmp("help", "hello")


def test_strncmp_limits_comparison():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")
    assert strncmp("a", "b", 0) == 0


def test_strncmp_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_substr_ranges():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 3, 100) == "lo"


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)