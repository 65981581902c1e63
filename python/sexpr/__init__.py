"""S-expression parser and canonical printer.

``parse`` returns a :class:`ParseError` value on malformed input; ``loads`` is
the same parse but raises :class:`SExprSyntaxError` instead.
"""

from __future__ import annotations

import logging

from sexpr._parser import Source, parse
from sexpr._serializer import serialize
from sexpr.errors import ParseError, ParseResult, SExprSyntaxError
from sexpr.expression import (
    Bool,
    Char,
    Expression,
    Float,
    Int,
    List,
    String,
    Symbol,
)

logger = logging.getLogger(__name__)


def loads(source: Source, *, strict: bool = False) -> Expression:
    """Parse *source* and return the expression.

    Raises:
        SExprSyntaxError: If the input is malformed.
        TypeError: If *source* is not text or a bytes-like object.

    """
    result = parse(source, strict=strict)
    if isinstance(result, ParseError):
        logger.debug("raising for %s", result)
        raise SExprSyntaxError(result)
    return result


__all__ = [
    "Bool",
    "Char",
    "Expression",
    "Float",
    "Int",
    "List",
    "ParseError",
    "ParseResult",
    "SExprSyntaxError",
    "String",
    "Symbol",
    "loads",
    "parse",
    "serialize",
]
