import pytest

from manytypes.spelling import parse_elaborated_spelling


def test_keyword_and_name():
    assert parse_elaborated_spelling("struct foo") == ("struct", "", "foo")


def test_plain_name():
    assert parse_elaborated_spelling("foo") == ("", "", "foo")


def test_scope_trailing_separator_removed():
    assert parse_elaborated_spelling("ns::inner::foo") == ("", "ns::inner", "foo")


def test_keyword_with_scope():
    assert parse_elaborated_spelling("union ns::value") == ("union", "ns", "value")


def test_surrounding_whitespace_ignored():
    assert parse_elaborated_spelling("  enum   E  ") == ("enum", "", "E")


@pytest.mark.parametrize("keyword", ["struct", "class", "union", "enum"])
def test_all_keywords_recognised(keyword):
    result = parse_elaborated_spelling(f"{keyword} thing")
    assert result is not None
    assert result[0] == keyword
    assert result[2] == "thing"