import pytest

from siege.perl import chomp, empty, ltrim, rtrim, split, trim, word_count


def test_chomp_removes_one_newline():
    assert chomp("abc\n") == "abc"
    assert chomp("abc\n\n") == "abc\n"
    assert chomp("abc") == "abc"
    assert chomp("") == ""


def test_trims():
    assert rtrim("  a b \t\n") == "  a b"
    assert ltrim("\t a b  ") == "a b  "
    assert trim(" \r a b \v") == "a b"


def test_trims_accept_none():
    assert rtrim(None) is None
    assert ltrim(None) is None
    assert trim(None) is None


def test_trim_is_idempotent():
    once = trim("  x y  ")
    assert trim(once) == once


@pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
def test_empty_true(text):
    assert empty(text) is True


def test_empty_false():
    assert empty("  x ") is False


def test_split_drops_empty_pieces():
    assert split(",", ",a,,b,") == ["a", "b"]
    assert split(" ", "   ") == []


def test_word_count_matches_split():
    text = "  alpha beta   gamma "
    assert word_count(" ", text) == len(split(" ", text))
    assert split(" ", text) == ["alpha", "beta", "gamma"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("ab", "xaby")
    with pytest.raises(ValueError):
        word_count("", "xy")