"""Cursor positions for the tokenizer.

Provides the Position dataclass used by the lexer cursor and by error
messages.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Line and column of the lexer cursor.

    Both values are 1-indexed. The column counts bytes, not characters,
    since the lexer works on a raw byte stream.

    Examples:
        >>> Position(1, 1)
        Position(line=1, column=1)
        >>> str(Position(3, 7))
        '3:7'

    """

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    @classmethod
    def start(cls) -> Position:
        """Position of the first byte of a stream."""
        return cls(line=1, column=1)
