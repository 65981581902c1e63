from __future__ import annotations

from typing import Final

import pytest

import sexpr

SMALL: Final[bytes] = b"(a b c d e)"

MEDIUM: Final[bytes] = (
    b'(node (kind "widget") (id 42) (pos 12.5 -3.2) (size 100 200) (visible #t) (z-order 3))'
)

LARGE: Final[bytes] = (
    b"(module"
    b' (meta (version 1234) (name "bench fixture"))'
    b" (define (area w h) (* w h))"
    b" (define (scale v k) (map (lambda (x) (* x k)) v))"
    + b"".join(
        f" (entry {i} (p {i * -1.5} {i * 0.25}) (q {i}e-3 -{i}.0) (tag \"e{i}\") (ok? #t))".encode()
        for i in range(24)
    )
    + b")"
)


def generate(depth: int, width: int) -> bytes:
    """Nest ``depth`` lists, each carrying ``width`` mixed atoms."""
    atoms = b" ".join(
        (f"s{i}" if i % 3 == 0 else f"{i}" if i % 3 == 1 else f'"t{i}"').encode()
        for i in range(width)
    )

    def _build(d: int) -> bytes:
        if d == 0:
            return atoms
        inner = _build(d - 1)
        label = f"level-{d}".encode()
        return b"(" + label + b" " + inner + b" " + atoms + b")"

    return b"(" + _build(depth) + b")"


_DEEP_DEPTH: Final[int] = 8
_DEEP_WIDTH: Final[int] = 6
DEEP: Final[bytes] = generate(_DEEP_DEPTH, _DEEP_WIDTH)

_WIDE_DEPTH: Final[int] = 1
_WIDE_WIDTH: Final[int] = 34
WIDE: Final[bytes] = generate(_WIDE_DEPTH, _WIDE_WIDTH)

# Nesting far past the interpreter's default recursion limit.
TOWER: Final[bytes] = b"(" * 10_000 + b"x" + b")" * 10_000

INPUTS: Final = [
    pytest.param(SMALL, id="small"),
    pytest.param(MEDIUM, id="medium"),
    pytest.param(LARGE, id="large"),
    pytest.param(DEEP, id="deep"),
    pytest.param(TOWER, id="tower"),
]


def parse_checked(data: bytes) -> sexpr.Expression:
    """Parse *data* and fail the benchmark on a parse error."""
    result = sexpr.parse(data, strict=True)
    if isinstance(result, sexpr.ParseError):
        pytest.fail(f"benchmark input does not parse: {result}")
    return result
