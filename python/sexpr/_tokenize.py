"""Tokenizers for the three kinds of atom.

Each reader starts at ``cursor.offset``, consumes the longest valid run of
bytes and returns either the token or a :class:`~sexpr.errors.ParseError`.
None of them skip leading whitespace.
"""

from __future__ import annotations

from sexpr._classify import (
    QUOTE,
    is_numeric,
    is_separator,
    is_symbol_part,
    is_symbol_start,
)
from sexpr._cursor import Cursor
from sexpr.errors import ParseError, ParseResult
from sexpr.expression import INT_MAX, INT_MIN, Float, Int


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def _to_int(text: str) -> int | None:
    # Only sign and digits reach int(); ".", "e" and "E" go to the float parse.
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body.isdigit():
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def _to_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def read_number(cursor: Cursor) -> ParseResult[Int | Float]:
    """Read a numeric literal as :class:`Int` if possible, else :class:`Float`.

    The literal runs until a separator or the end of input.  Any byte other
    than a digit, sign, ``.``, ``e`` or ``E`` before that point is an error.
    """
    start = cursor.offset
    while True:
        c = cursor.peek()
        if c is None:
            break
        if is_numeric(c):
            cursor.consume()
        elif is_separator(c):
            break
        else:
            return ParseError("unexpected character in numeric literal", cursor.offset)

    text = cursor.buffer[start : cursor.offset].decode("ascii")
    as_int = _to_int(text)
    if as_int is not None:
        return Int(as_int)
    as_float = _to_float(text)
    if as_float is not None:
        return Float(as_float)
    return ParseError("invalid number format", cursor.offset)


def read_string(cursor: Cursor) -> ParseResult[str]:
    """Read a double-quoted literal and return the text between the quotes.

    Bytes are taken verbatim: a backslash is an ordinary character.
    """
    if cursor.peek() != QUOTE:
        return ParseError("expected opening quote", cursor.offset)
    cursor.consume()

    start = cursor.offset
    while True:
        c = cursor.consume()
        if c is None:
            return ParseError("unexpected end of stream in string", cursor.offset)
        if c == QUOTE:
            return _decode(cursor.buffer[start : cursor.offset - 1])


def read_symbol(cursor: Cursor) -> ParseResult[str]:
    """Read an identifier or operator run such as ``t123`` or ``+=``.

    The first byte must be a letter or operator character; digits are allowed
    after it.  The byte that ends the symbol is left unconsumed.
    """
    c = cursor.peek()
    if c is None or not is_symbol_start(c):
        return ParseError("expected alpha or operator character", cursor.offset)

    start = cursor.offset
    while c is not None and is_symbol_part(c):
        cursor.consume()
        c = cursor.peek()
    return _decode(cursor.buffer[start : cursor.offset])
