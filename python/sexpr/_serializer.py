"""Canonical text output for expression trees."""

from __future__ import annotations

import math

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


def _atom_text(atom: Expression) -> str:
    if isinstance(atom, Symbol):
        return atom.value
    if isinstance(atom, Int):
        return str(atom.value)
    if isinstance(atom, Float):
        if math.isinf(atom.value):
            # Overflows back to infinity when read.
            return "1e999" if atom.value > 0 else "-1e999"
        # repr keeps a "." or exponent, so the text reads back as a Float.
        return repr(atom.value)
    if isinstance(atom, String):
        # No escaping: embedded quotes do not survive a round trip.
        return f'"{atom.value}"'
    if isinstance(atom, Bool):
        return "true" if atom.value else "false"
    if isinstance(atom, Char):
        return atom.value
    raise TypeError(f"cannot serialize {type(atom).__name__}")


def serialize(expression: Expression) -> str:
    """Return the canonical text of *expression*.

    Lists print as ``(`` + elements separated by single spaces + ``)`` with no
    other whitespace.  Traversal uses an explicit stack, so any depth works.

    Raises:
        TypeError: If the tree contains something that is not an expression.

    """
    out: list[str] = []
    pending: list[Expression | str] = [expression]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, List):
            out.append("(")
            pending.append(")")
            elements = item.elements
            for i in range(len(elements) - 1, -1, -1):
                pending.append(elements[i])
                if i:
                    pending.append(" ")
        else:
            out.append(_atom_text(item))
    return "".join(out)
