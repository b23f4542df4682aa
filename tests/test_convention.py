"""Tests for filename conventions."""

import pytest

from sitegen.models import BlogEntry
from sitegen.source.convention import basename, classify_filename, deduce_title, is_blog_entry


@pytest.mark.parametrize("name", [
    "2012-01-01-simple",
    "2012-01-01-more-complex",
    "1234-56-78-a-b-c_def",
    "1234-56-78-_",
    "1234-56-78-a_b_c",
])
def test_blog_entry_accepted(name):
    assert is_blog_entry(name)


@pytest.mark.parametrize("name", [
    "2012-01-01",
    "0000-00-00",
    "2012-1-1",
    "2012-01-1",
    "2012-1-01",
    "2012-01-01-",
    "12012-01-01-x",
    "index",
    "",
])
def test_blog_entry_rejected(name):
    assert classify_filename(name) is None


def test_classify_extracts_date_and_slug():
    entry = classify_filename("2012-03-04-hello-there")
    assert entry == BlogEntry(year="2012", month="03", day="04", slug="hello-there")


def test_classify_checks_shape_not_calendar():
    entry = classify_filename("1234-56-78-_")
    assert entry.month == "56"
    assert entry.slug == "_"


def test_classify_rejects_non_ascii_digits():
    assert classify_filename("٢٠١٢-01-01-x") is None


def test_deduce_title():
    assert deduce_title("hello") == "Hello"
    assert deduce_title("hello-there") == "Hello there"


def test_deduce_title_keeps_other_case():
    assert deduce_title("iPhone-SDK-notes") == "IPhone SDK notes"
    assert deduce_title("a_b-c") == "A_b c"
    assert deduce_title("") == ""


def test_basename_strips_extension():
    assert basename("/site", "foo.src") == "foo"
    assert basename("/site", "a/b/c.txt") == "a/b/c"
    assert basename("/site", "/site/blog/2012-01-01-hello.md") == "blog/2012-01-01-hello"
    assert basename("/site", "README") == "README"


def test_basename_outside_root():
    with pytest.raises(ValueError):
        basename("/site", "/elsewhere/foo.md")
