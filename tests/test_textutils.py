import time

from shrekdoc import decode
from shrekdoc.textutils import unserialize


def test_list_literal():
    assert unserialize('{a, "b", c}') == ["a", "b", "c"]


def test_list_literal_trailing_comma():
    assert unserialize('{a, b,}') == ["a", "b"]


def test_dict_literal():
    assert unserialize('{width = 10, name = "doc"}') == {"width": "10", "name": "doc"}


def test_quoted_values_keep_commas():
    assert unserialize('{name = "a, b", c}') == '{name = "a, b", c}'
    assert unserialize('{"a, b", c}') == ["a, b", "c"]


def test_string_literal_escapes():
    assert unserialize('"line\\nnext"') == "line\nnext"
    assert unserialize('"say \\"hi\\""') == 'say "hi"'
    assert unserialize('"\\65\\066"') == "AB"


def test_other_text_is_returned_unchanged():
    assert unserialize("plain") == "plain"
    assert unserialize("{}") == "{}"
    assert unserialize('{a, "b}') == '{a, "b}'
    assert unserialize("{a,, b}") == "{a,, b}"


def test_unterminated_pairs_return_quickly():
    """Pair-like text without a closing brace is not a literal."""
    text = "{" + "a=a " * 30
    started = time.perf_counter()
    assert unserialize(text) == text
    assert unserialize(text + "}") == text + "}"
    assert time.perf_counter() - started < 1.0


def test_decode_unterminated_pairs_returns_quickly():
    """An unparsed serialized body is kept as raw text."""
    body = "{" + "a=a " * 30
    started = time.perf_counter()
    doc = decode("shrekdoc-v01w10h02mS:" + body)
    assert doc.editable.glyphs == body
    assert time.perf_counter() - started < 1.0
