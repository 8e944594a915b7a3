import pytest

from dbjson.services.text_utils import omit_blank, split_string, trim_string


@pytest.mark.parametrize(
    "text, separator",
    [
        ("a|b|c", "|"),
        ("|a||b|", "|"),
        ("", "|"),
        ("no separator here", "|"),
        ("line1\nline2\n", "\n"),
        ("a::b:::c", "::"),
    ],
)
def test_split_then_join_gives_back_input(text, separator):
    assert separator.join(split_string(text, separator)) == text


def test_split_without_separator_returns_whole_text():
    assert split_string("people", " ") == ["people"]
    assert split_string("", " ") == [""]


def test_split_keeps_empty_fields():
    assert split_string("2|Bob|", "|") == ["2", "Bob", ""]


def test_split_rejects_empty_separator():
    with pytest.raises(ValueError):
        split_string("abc", "")


def test_trim():
    assert trim_string("") == ""
    assert trim_string("  a \t") == "a"
    assert trim_string(" \t\r\n ") == ""
    assert trim_string("\r\nin  side\n") == "in  side"


@pytest.mark.parametrize("text", ["", "  x  ", "\tfoo bar\r\n", "   "])
def test_trim_is_idempotent(text):
    assert trim_string(trim_string(text)) == trim_string(text)


def test_omit_blank_preserves_order():
    assert omit_blank(["b", "", "  ", "a", "\t\n", "c "]) == ["b", "a", "c "]
    assert omit_blank([]) == []
