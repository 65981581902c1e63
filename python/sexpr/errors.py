"""Error values produced by the parser and the exception raised by ``loads``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ParseError:
    """Why and where a parse stopped.

    This is a plain value, not an exception: every tokenizer returns it in
    place of a result and callers test for it with ``isinstance``.

    Attributes:
        message: Fixed human-readable description of the failure.
        offset:  Byte position in the original input where it was detected.

    """

    message: str
    offset: int

    def __str__(self) -> str:
        return f"{self.message} at offset {self.offset}"


# Either a successful payload or the first error encountered.
ParseResult = Union[T, ParseError]


class SExprSyntaxError(ValueError):
    """Raised by :func:`sexpr.loads` when the input is malformed."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def offset(self) -> int:
        return self.error.offset
