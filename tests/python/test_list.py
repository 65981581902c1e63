from sexpr import Float, Int, List, ParseError, String, Symbol
from sexpr._cursor import Cursor
from sexpr._parser import read_list


def _read(text):
    return read_list(Cursor(text.encode()))


def test_flat():
    assert _read("(abcd 123 abc)") == List([Symbol("abcd"), Int(123), Symbol("abc")])


def test_empty():
    assert _read("()") == List([])


def test_empty_with_whitespace():
    assert _read("( \n\t)") == List([])


def test_nested():
    expected = List([Symbol("a"), List([Symbol("b"), List([Symbol("c")])]), Symbol("d")])
    assert _read("(a (b (c)) d)") == expected


def test_no_space_needed_around_parens():
    assert _read("(a(b)c)") == List([Symbol("a"), List([Symbol("b")]), Symbol("c")])


def test_mixed_atoms():
    result = _read('(1 -2.5 "s p" sym)')
    assert result == List([Int(1), Float(-2.5), String("s p"), Symbol("sym")])


def test_string_directly_before_close():
    assert _read('("x")') == List([String("x")])


def test_number_directly_before_close():
    assert _read("(1)") == List([Int(1)])


def test_consumes_closing_paren_only():
    cursor = Cursor(b"(a) b")
    assert read_list(cursor) == List([Symbol("a")])
    assert cursor.offset == 3


def test_missing_open():
    assert _read("a)") == ParseError("unexpected character in list", 0)


def test_empty_input():
    assert _read("") == ParseError("unexpected end of stream in list", 0)


def test_unclosed():
    assert _read("(a b") == ParseError("unexpected end of stream in list", 4)


def test_unclosed_nested():
    assert _read("(a (b c)") == ParseError("unexpected end of stream in list", 8)


def test_element_error_propagates():
    assert _read("(a 12b)") == ParseError("unexpected character in numeric literal", 5)


def test_bad_character_in_list():
    assert _read("(a ] b)") == ParseError("unexpected character", 3)


def test_deep_nesting_beyond_recursion_limit():
    depth = 5000
    result = _read("(" * depth + "x" + ")" * depth)
    assert isinstance(result, List)
    node = result
    for _ in range(depth - 1):
        assert len(node) == 1
        node = node[0]
    assert node == List([Symbol("x")])


def test_nesting_preserves_order_and_count():
    result = _read("((1 2 3) (4 (5 6)) () 7)")
    assert len(result) == 4
    assert result[0] == List([Int(1), Int(2), Int(3)])
    assert result[1] == List([Int(4), List([Int(5), Int(6)])])
    assert result[2] == List([])
    assert result[3] == Int(7)
