import pytest

import sexpr
from sexpr import Int, List, ParseError, String, Symbol


def test_parse_list():
    assert sexpr.parse("(abcd 123 abc)") == List([Symbol("abcd"), Int(123), Symbol("abc")])


def test_parse_bytes():
    assert sexpr.parse(b"(a b)") == List([Symbol("a"), Symbol("b")])


def test_parse_bytearray():
    assert sexpr.parse(bytearray(b"(a b)")) == List([Symbol("a"), Symbol("b")])


def test_parse_memoryview():
    assert sexpr.parse(memoryview(b"42")) == Int(42)


def test_parse_atom():
    assert sexpr.parse("hello") == Symbol("hello")


def test_parse_string_atom():
    assert sexpr.parse('"hello"') == String("hello")


def test_parse_empty_list():
    assert sexpr.parse("()") == List([])


def test_leading_whitespace_skipped():
    assert sexpr.parse(" \n\t(a)") == List([Symbol("a")])


def test_trailing_content_ignored():
    assert sexpr.parse("(a) (b)") == List([Symbol("a")])
    assert sexpr.parse("a)") == Symbol("a")


def test_strict_rejects_trailing_content():
    assert sexpr.parse("(a) (b)", strict=True) == ParseError("unexpected trailing content", 4)


def test_strict_allows_trailing_whitespace():
    assert sexpr.parse("(a) \n", strict=True) == List([Symbol("a")])


def test_strict_reports_earlier_error_first():
    assert sexpr.parse("(a", strict=True) == ParseError("unexpected end of stream in list", 2)


def test_empty_input():
    assert sexpr.parse("") == ParseError("unexpected end of stream", 0)


def test_whitespace_only():
    assert sexpr.parse("   ") == ParseError("unexpected end of stream", 3)


def test_stray_close():
    assert sexpr.parse(")") == ParseError("unexpected character", 0)


def test_unclosed():
    result = sexpr.parse("(unclosed")
    assert isinstance(result, ParseError)
    assert result.offset == 9


def test_offsets_are_bytes():
    result = sexpr.parse('("é" 1x)')
    assert result == ParseError("unexpected character in numeric literal", 7)


def test_error_str():
    assert str(ParseError("unexpected character", 3)) == "unexpected character at offset 3"


def test_non_bytes_raises_type_error():
    with pytest.raises(TypeError):
        sexpr.parse(42)


def test_parse_failure_is_logged(caplog):
    with caplog.at_level("DEBUG", logger="sexpr"):
        sexpr.parse("(a")
    assert "unexpected end of stream in list at offset 2" in caplog.text
