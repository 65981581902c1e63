"""Token dispatch and the list state machine."""

from __future__ import annotations

import logging

from sexpr._classify import (
    LPAREN,
    MINUS,
    PLUS,
    QUOTE,
    RPAREN,
    is_digit,
    is_symbol_start,
)
from sexpr._cursor import Cursor
from sexpr._tokenize import read_number, read_string, read_symbol
from sexpr.errors import ParseError, ParseResult
from sexpr.expression import Expression, List, String, Symbol

logger = logging.getLogger(__name__)

Source = bytes | bytearray | memoryview | str


def _starts_number(cursor: Cursor, c: int) -> bool:
    if is_digit(c):
        return True
    if c == PLUS or c == MINUS:
        nxt = cursor.peek(1)
        return nxt is not None and is_digit(nxt)
    return False


def _read_atom(cursor: Cursor) -> ParseResult[Expression]:
    c = cursor.peek()
    if c is None:
        return ParseError("unexpected end of stream", cursor.offset)
    if c == QUOTE:
        text = read_string(cursor)
        return text if isinstance(text, ParseError) else String(text)
    # A sign only starts a number when a digit follows: "-5" vs "->".
    if _starts_number(cursor, c):
        return read_number(cursor)
    if is_symbol_start(c):
        name = read_symbol(cursor)
        return name if isinstance(name, ParseError) else Symbol(name)
    return ParseError("unexpected character", cursor.offset)


def read_token(cursor: Cursor) -> ParseResult[Expression]:
    """Read one expression, atom or list, starting exactly at the cursor."""
    if cursor.peek() == LPAREN:
        return read_list(cursor)
    return _read_atom(cursor)


def read_list(cursor: Cursor) -> ParseResult[List]:
    """Read a parenthesised list, including any lists nested inside it.

    Open lists are kept on an explicit stack instead of recursing, so nesting
    depth is bounded by memory rather than the interpreter's recursion limit.
    """
    c = cursor.peek()
    if c is None:
        return ParseError("unexpected end of stream in list", cursor.offset)
    if c != LPAREN:
        return ParseError("unexpected character in list", cursor.offset)
    cursor.consume()

    stack: list[list[Expression]] = [[]]
    while True:
        cursor.skip_whitespace()
        c = cursor.peek()
        if c is None:
            return ParseError("unexpected end of stream in list", cursor.offset)
        if c == RPAREN:
            cursor.consume()
            done = List(stack.pop())
            if not stack:
                return done
            stack[-1].append(done)
        elif c == LPAREN:
            cursor.consume()
            stack.append([])
        else:
            item = _read_atom(cursor)
            if isinstance(item, ParseError):
                return item
            stack[-1].append(item)


def _as_bytes(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8", "surrogateescape")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    raise TypeError(
        f"expected str, bytes, bytearray or memoryview, got {type(source).__name__}"
    )


def parse(source: Source, *, strict: bool = False) -> ParseResult[Expression]:
    """Parse one S-expression from the start of *source*.

    Leading whitespace is skipped.  Anything after the first complete
    expression is ignored unless *strict* is set, in which case only
    whitespace may follow it.

    Returns:
        The expression, or a :class:`ParseError` describing the first failure.

    Raises:
        TypeError: If *source* is not text or a bytes-like object.

    """
    cursor = Cursor(_as_bytes(source))
    cursor.skip_whitespace()
    result = read_token(cursor)
    if strict and not isinstance(result, ParseError):
        cursor.skip_whitespace()
        if not cursor.at_end():
            result = ParseError("unexpected trailing content", cursor.offset)
    if isinstance(result, ParseError):
        logger.debug("parse failed: %s", result)
    return result
