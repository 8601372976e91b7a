import pytest

from gamecore.string_utils import (
    DEFAULT_MAX_LENGTH,
    split_string_on_delimiter,
    stringf,
)


def test_stringf_formats_integer_and_string():
    assert stringf("%s has %i", "box", 3) == "box has 3"


def test_stringf_without_args_handles_percent_escape():
    assert stringf("100%%") == "100%"


def test_stringf_truncates_to_default_buffer():
    result = stringf("%s", "x" * 5000)
    assert len(result) == DEFAULT_MAX_LENGTH - 1
    assert set(result) == {"x"}


def test_stringf_truncates_to_given_length():
    result = stringf("%s", "abcdefghij", max_length=4)
    assert result == "abc"


def test_stringf_short_text_untouched_by_limit():
    assert stringf("%s", "hello", max_length=100) == "hello"


def test_stringf_rejects_bad_length():
    with pytest.raises(ValueError):
        stringf("abc", max_length=0)


def test_split_simple():
    assert split_string_on_delimiter("a,b,c", ",") == ["a", "b", "c"]


def test_split_drops_empty_pieces():
    assert split_string_on_delimiter(",,a,,b,", ",") == ["a", "b"]


def test_split_empty_string():
    assert split_string_on_delimiter("", ",") == []


def test_split_no_delimiter_present():
    assert split_string_on_delimiter("hello world", ",") == ["hello world"]


def test_split_only_delimiters():
    assert split_string_on_delimiter("~~~", "~") == []


@pytest.mark.parametrize("pieces", [["x"], ["one", "two"], ["255", "0", "128", "64"]])
def test_split_round_trip(pieces):
    joined = ",".join(pieces)
    assert split_string_on_delimiter(joined, ",") == pieces


def test_split_rejects_multi_char_delimiter():
    with pytest.raises(ValueError):
        split_string_on_delimiter("a::b", "::")