"""Read position over an immutable byte buffer."""

from __future__ import annotations

from sexpr._classify import is_whitespace


class Cursor:
    """A byte buffer plus the offset of the next unread byte.

    ``peek`` and ``consume`` are the only operations that look at the buffer
    and ``consume`` is the only one that moves ``offset``.  A cursor belongs to
    a single parse call and is handed to every tokenizer it drives, so after a
    failure ``offset`` points exactly where scanning stopped.
    """

    __slots__ = ("buffer", "offset")

    def __init__(self, buffer: bytes, offset: int = 0) -> None:
        self.buffer = buffer
        self.offset = offset

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, size={len(self.buffer)})"

    def peek(self, ahead: int = 0) -> int | None:
        """Byte at ``offset + ahead`` without advancing, or ``None`` past the end."""
        pos = self.offset + ahead
        if pos >= len(self.buffer):
            return None
        return self.buffer[pos]

    def consume(self) -> int | None:
        """Byte at ``offset``, advancing past it, or ``None`` at the end."""
        c = self.peek()
        if c is not None:
            self.offset += 1
        return c

    def at_end(self) -> bool:
        return self.offset >= len(self.buffer)

    def skip_whitespace(self) -> None:
        c = self.peek()
        while c is not None and is_whitespace(c):
            self.consume()
            c = self.peek()
