"""The expression tree produced by :func:`sexpr.parse`.

An :data:`Expression` is exactly one of seven frozen dataclasses.  Equality is
structural and never crosses variants, so ``Int(1) != Float(1.0)``.  ``repr()``
of any expression is its canonical text, the same string
:func:`sexpr.serialize` returns.

``Bool`` and ``Char`` are never produced by the parser; they exist for trees
built in code.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final, Union, overload

INT_MIN: Final[int] = -(2**63)
INT_MAX: Final[int] = 2**63 - 1


class _Canonical:
    __slots__ = ()

    def __repr__(self) -> str:
        from sexpr._serializer import serialize

        return serialize(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True, repr=False)
class Bool(_Canonical):
    value: bool


@dataclass(frozen=True, slots=True, repr=False)
class Char(_Canonical):
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char holds exactly one character, got {self.value!r}")


@dataclass(frozen=True, slots=True, repr=False)
class Int(_Canonical):
    """Signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 64-bit integer")


@dataclass(frozen=True, slots=True, repr=False)
class Float(_Canonical):
    value: float


@dataclass(frozen=True, slots=True, repr=False)
class String(_Canonical):
    """Text that was enclosed in double quotes, stored without the quotes."""

    value: str


@dataclass(frozen=True, slots=True, repr=False)
class Symbol(_Canonical):
    value: str


@dataclass(frozen=True, slots=True, repr=False, eq=False)
class List(_Canonical):
    """Ordered sequence of expressions.

    Any iterable is accepted at construction and stored as a tuple.
    """

    elements: tuple[Expression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.elements)

    @overload
    def __getitem__(self, index: int) -> Expression: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Expression, ...]: ...
    def __getitem__(self, index: int | slice) -> Expression | tuple[Expression, ...]:
        return self.elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        # Walk nested lists with a stack so arbitrarily deep trees compare.
        pending: list[tuple[List, List]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if len(left.elements) != len(right.elements):
                return False
            for a, b in zip(left.elements, right.elements):
                if isinstance(a, List) and isinstance(b, List):
                    if a is not b:
                        pending.append((a, b))
                elif a != b:
                    return False
        return True

    def __hash__(self) -> int:
        # Post-order over nested lists; each frame collects its children's hashes.
        frames: list[tuple[Iterator[Expression], list[int]]] = [(iter(self.elements), [])]
        while True:
            children, hashes = frames[-1]
            for child in children:
                if isinstance(child, List):
                    frames.append((iter(child.elements), []))
                    break
                hashes.append(hash(child))
            else:
                frames.pop()
                value = hash((List, tuple(hashes)))
                if not frames:
                    return value
                frames[-1][1].append(value)


Expression = Union[Bool, Char, Int, Float, String, Symbol, List]

