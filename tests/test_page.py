import pytest

from siege.page import Page


def test_initial_value_and_length():
    page = Page("hello")
    assert page.value() == "hello"
    assert len(page) == 5


def test_initial_capacity_has_slack():
    page = Page("abc")
    assert page.size() == 3 + 24576


def test_default_is_empty():
    page = Page()
    assert page.value() == ""
    assert len(page) == 0


def test_concat_appends():
    page = Page("ab")
    page.concat("cd", 2)
    page.concat("ef")
    assert page.value() == "abcdef"
    assert len(page) == 6


def test_concat_truncates_to_length():
    page = Page("")
    page.concat("abcdef", 3)
    assert page.value() == "abc"
    assert len(page) == 3


@pytest.mark.parametrize("text,length", [("", 0), (None, 3), ("abc", -1)])
def test_concat_ignores_bad_input(text, length):
    page = Page("x")
    page.concat(text, length)
    assert page.value() == "x"
    assert len(page) == 1


def test_concat_grows_capacity_on_overflow():
    page = Page("")
    chunk = "x" * (24576 + 1)
    page.concat(chunk, len(chunk))
    assert page.size() == 24576 + len(chunk) + 1
    assert page.value() == chunk


def test_concat_within_capacity_keeps_size():
    page = Page("a")
    before = page.size()
    page.concat("b" * 100)
    assert page.size() == before


def test_clear_keeps_capacity():
    page = Page("content")
    size = page.size()
    page.clear()
    assert page.value() == ""
    assert len(page) == 0
    assert page.size() == size


def test_reuse_after_clear():
    page = Page("one")
    page.clear()
    page.concat("two")
    assert page.value() == "two"