"""Exception classes for Pluma.

Provides standardized exceptions for error handling throughout Pluma.

Tokenizer failures fall into three groups:
- EndOfInput: the byte source is exhausted (normal end of iteration)
- UnexpectedCharError: a fixed delimiter such as ``<<<`` was not matched
- LexerBugError: the word scanner could not consume anything (internal defect)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pluma.location import Position


def describe_byte(byte: int | None) -> str:
    """Describe a byte for error messages.

    Examples:
        >>> describe_byte(ord("x"))
        "'x'"
        >>> describe_byte(10)
        "'\\\\n'"
        >>> describe_byte(None)
        'end of input'
    """
    if byte is None:
        return "end of input"
    if 0x20 <= byte < 0x7F:
        return repr(chr(byte))
    if byte in (0x09, 0x0A, 0x0D):
        return repr(chr(byte))
    return f"0x{byte:02x}"


class PlumaError(Exception):
    """Base exception for all Pluma errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(PlumaError):
    """Error raised by the tokenizer.

    Carries the cursor position at the time of failure.
    """

    def __init__(
        self,
        message: str,
        pos: Position | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            pos: Cursor position where the error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.pos = pos
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if pos is not None:
            location += f"{pos.line}:{pos.column}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @property
    def lineno(self) -> int | None:
        return self.pos.line if self.pos is not None else None

    @property
    def col_offset(self) -> int | None:
        return self.pos.column if self.pos is not None else None


class EndOfInput(LexError):
    """The byte source is exhausted.

    Not a failure for consumers: ``Lexer.tokenize()`` turns it into the end
    of iteration.
    """

    def __init__(self, pos: Position | None = None, source_file: str | None = None) -> None:
        super().__init__("end of input", pos, source_file)


class UnexpectedCharError(LexError):
    """A multi-character delimiter was not matched.

    Attributes:
        actual: The byte found, or None at end of input
        expected: The byte(s) the lexer required at this point
    """

    def __init__(
        self,
        actual: int | None,
        expected: bytes,
        pos: Position | None = None,
        source_file: str | None = None,
    ) -> None:
        self.actual = actual
        self.expected = expected
        wanted = " or ".join(describe_byte(b) for b in expected)
        super().__init__(
            f"unexpected {describe_byte(actual)}, expected {wanted}",
            pos,
            source_file,
        )


class LexerBugError(LexError):
    """Internal invariant violation in the lexer.

    Raised when word classification and the delimiter set disagree, i.e. the
    word scanner was entered on a byte it cannot consume.
    """

    def __init__(
        self,
        actual: int | None,
        pos: Position | None = None,
        source_file: str | None = None,
    ) -> None:
        self.actual = actual
        super().__init__(
            f"bug in the lexer, next character {describe_byte(actual)} "
            "is not part of a word token",
            pos,
            source_file,
        )


class RenderError(PlumaError):
    """Error during HTML rendering.

    Raised when the generator is handed a node or item kind it does not know.
    """

    pass
