"""Byte classification for the tokenizer.

Every predicate takes a single byte as an ``int`` (as produced by indexing a
``bytes`` object) and only recognises ASCII.
"""

from __future__ import annotations

from typing import Final

QUOTE: Final[int] = ord('"')
LPAREN: Final[int] = ord("(")
RPAREN: Final[int] = ord(")")
PLUS: Final[int] = ord("+")
MINUS: Final[int] = ord("-")

_OPERATORS: Final[frozenset[int]] = frozenset(b"+-*/%~!@#$^&|_=<>?.:\\'")
_WHITESPACE: Final[frozenset[int]] = frozenset(b" \n\t")
# The apostrophe is also an operator character.
_SEPARATORS: Final[frozenset[int]] = frozenset(b"(){},'\"") | _WHITESPACE
_NUMERIC: Final[frozenset[int]] = frozenset(b"0123456789+-.eE")


def is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def is_alpha(c: int) -> bool:
    return 0x61 <= c <= 0x7A or 0x41 <= c <= 0x5A


def is_operator(c: int) -> bool:
    return c in _OPERATORS


def is_whitespace(c: int) -> bool:
    return c in _WHITESPACE


def is_separator(c: int) -> bool:
    return c in _SEPARATORS


def is_numeric(c: int) -> bool:
    """Return ``True`` for bytes that may appear inside a numeric literal."""
    return c in _NUMERIC


def is_symbol_start(c: int) -> bool:
    return is_alpha(c) or is_operator(c)


def is_symbol_part(c: int) -> bool:
    return is_alpha(c) or is_operator(c) or is_digit(c)
