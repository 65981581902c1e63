"""CLI: python -m sexpr [FILE] [--strict] [--verbose]"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from sexpr import ParseError, parse, serialize


def _read(path: str | None) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m sexpr",
        description="Parse one S-expression and print its canonical form.",
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject anything but whitespace after the expression",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    result = parse(_read(args.file), strict=args.strict)
    if isinstance(result, ParseError):
        print(f"error: {result}", file=sys.stderr)
        return 1
    # Text may carry undecodable input bytes as surrogates; write them back raw.
    sys.stdout.flush()
    sys.stdout.buffer.write(serialize(result).encode("utf-8", "surrogateescape") + b"\n")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
