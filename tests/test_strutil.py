import pytest

from minishell.charutil import tolower, toupper
from minishell.strutil import (
    memcmp,
    split,
    strchr,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_only_separators_gives_empty_list():
    assert split(",,,", ",") == []


def test_split_accepts_code_point():
    assert split("a:b::c", ord(":")) == split("a:b::c", ":")


def test_split_pieces_never_contain_separator():
    pieces = split("x;yy;;zzz;", ";")
    assert all(piece and ";" not in piece for piece in pieces)
    assert "".join(pieces) == "x;yy;;zzz;".replace(";", "")


def test_split_nul_separator_keeps_whole_text():
    assert split("a b", "\0") == ["a b"]


def test_split_rejects_multi_character_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_leaves_inner_characters():
    assert strtrim("-a-b-", "-") == "a-b"


def test_substr_inside():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clipped_at_end():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_substr_negative_length_raises():
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


def test_strnstr_found_position_holds_needle():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"
    assert "bar" not in haystack[:index]


def test_strnstr_needle_must_fit_in_length():
    assert strnstr("foo bar", "bar", 6) is None


def test_strnstr_empty_needle_is_zero():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_limited_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_compares_with_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("hello", "help", 4) == -strncmp("help", "hello", 4)


def test_memcmp_unsigned():
    assert memcmp(b"\x01\xff", b"\x01\x00", 2) > 0


def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_past_end_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_strchr_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_nul_matches_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_accepts_code_point():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strrchr_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]
    assert strrchr(text, "l") > strchr(text, "l")


def test_strrchr_nul_and_missing():
    assert strrchr("abc", 0) == len("abc")
    assert strrchr("abc", "q") is None


def test_strmapi_upper():
    assert strmapi("abc", lambda _i, ch: toupper(ch)) == "ABC"


def test_strmapi_round_trip():
    text = "MiXeD"
    upper = strmapi(text, lambda _i, ch: toupper(ch))
    assert strmapi(upper, lambda _i, ch: tolower(ch)) == text.lower()


def test_strmapi_passes_indices_in_order():
    seen = []
    strmapi("wxyz", lambda i, ch: seen.append(i) or ch)
    assert seen == list(range(len("wxyz")))