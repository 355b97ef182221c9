from __future__ import annotations

from carbon_headlines.text import (
    normalize_whitespace,
    sort_strings,
    strip_html,
    truncate,
    uniq_strings,
)


def test_strip_html_removes_tags_and_decodes_entities():
    assert strip_html("  <p>Carbon &amp; <b>climate</b></p>\n") == "Carbon & climate"


def test_strip_html_drops_script_content():
    assert strip_html("<p>Text</p><script>var x = 1;</script>") == "Text"


def test_strip_html_empty_and_plain():
    assert strip_html("") == ""
    assert strip_html(None) == ""
    assert strip_html("  plain text ") == "plain text"


def test_normalize_whitespace():
    assert normalize_whitespace("  hello   world  ") == "hello world"
    assert normalize_whitespace("a\n\tb") == "a b"
    assert normalize_whitespace("") == ""


def test_sort_strings_returns_new_list():
    src = ["banana", "apple", "cherry"]
    out = sort_strings(src)
    assert out == ["apple", "banana", "cherry"]
    assert src == ["banana", "apple", "cherry"]


def test_uniq_strings_keeps_first_seen_order():
    assert uniq_strings(["a", "b", "a", "", "c", "b"]) == ["a", "b", "c"]


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("abcdefghij", 6) == "abc..."
    assert truncate("abcdef", 0) == "abcdef"
