"""Buffered, position-tracking lexer over a byte stream.

Reads the source through a fixed-size buffer, refilling it only when the
cursor reaches the filled length. Every consumed byte goes through
``_advance``, the single place where the line/column cursor moves.

Thread Safety:
Lexer instances are single-use. Create one per byte stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import Protocol

from pluma.config import get_config
from pluma.errors import EndOfInput, UnexpectedCharError
from pluma.lexer.scanners import (
    CommentScannerMixin,
    DelimiterScannerMixin,
    WordScannerMixin,
)
from pluma.location import Position
from pluma.tokens import Token
from pluma.utils.logger import get_logger

logger = get_logger(__name__)

_SLASH = ord("/")
_CR = ord("\r")


class ByteSource(Protocol):
    """Anything that can fill a buffer with bytes.

    ``readinto`` returns the number of bytes read; zero means the source is
    exhausted. Binary files, ``io.BytesIO`` and socket files all qualify.
    """

    def readinto(self, buffer: memoryview, /) -> int | None: ...


class Lexer(
    # Before DelimiterScannerMixin, which only stubs _scan_word
    WordScannerMixin,
    CommentScannerMixin,
    DelimiterScannerMixin,
):
    """Pull-based lexer producing one Token per call.

    Usage:
            >>> lexer = Lexer.from_bytes(b"Hello world\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(WORD, b'Hello')
        Token(SPACE, b' ')
        Token(WORD, b'world')
        Token(NEW_LINE, b'\\n')

    The cursor (``pos``) always points before the next byte to read.
    There is no rewind: each pull consumes input for good.

    """

    __slots__ = (
        "_reader",
        "_buffer",
        "_view",
        "_index",  # Cursor into _buffer
        "_size",  # Number of valid bytes in _buffer
        "_line",
        "_column",
        "_token_start",
        "_source_file",
    )

    def __init__(
        self,
        reader: ByteSource,
        *,
        buffer_size: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer over a byte source.

        Args:
            reader: Byte source to tokenize
            buffer_size: Read buffer size (defaults to the active config)
            source_file: Optional source file path for error messages
        """
        if buffer_size is None:
            buffer_size = get_config().buffer_size
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")

        self._reader = reader
        self._buffer = bytearray(buffer_size)
        self._view = memoryview(self._buffer)
        # Empty buffer: the first peek refills
        self._index = 0
        self._size = 0
        self._line = 1
        self._column = 1
        self._token_start: Position | None = None
        self._source_file = source_file

    @classmethod
    def from_bytes(cls, data: bytes, **kwargs: object) -> Lexer:
        """Create a lexer over an in-memory byte string."""
        return cls(io.BytesIO(data), **kwargs)  # type: ignore[arg-type]

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def pos(self) -> Position:
        """Current cursor position (before the next byte to read)."""
        return Position(self._line, self._column)

    @property
    def token_start(self) -> Position | None:
        """Position where the last returned token began, if any."""
        return self._token_start

    @property
    def source_file(self) -> str | None:
        return self._source_file

    def next_token(self) -> Token:
        """Pull the next token.

        Comments and carriage returns are skipped without producing a token.

        Raises:
            EndOfInput: The byte source is exhausted
            UnexpectedCharError: A ``<<<``, ``'''`` or ``//`` run was broken
            LexerBugError: The word scanner could not consume anything
        """
        while True:
            byte = self._peek()
            if byte is None:
                raise EndOfInput(self.pos, self._source_file)
            if byte == _SLASH:
                self._skip_comment()
                continue
            if byte == _CR:
                self._advance(byte)
                continue
            self._token_start = self.pos
            return self._classify(byte)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the byte source into a token stream.

        Yields:
            Token objects one at a time, ending cleanly at end of input.
            Other lexer errors propagate to the caller.
        """
        while True:
            try:
                token = self.next_token()
            except EndOfInput:
                return
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Buffer management
    # =========================================================================

    def _fill(self) -> bool:
        """Refill the buffer once the cursor has consumed it.

        Returns:
            False if the source is exhausted, True if a byte is available.
        """
        if self._index < self._size:
            return True
        count = self._reader.readinto(self._view)
        self._index = 0
        if not count:
            self._size = 0
            logger.debug("Byte source exhausted at %s", self.pos)
            return False
        self._size = count
        logger.debug("Refilled lexer buffer with %d bytes", count)
        return True

    def _peek(self) -> int | None:
        """Current byte without consuming it, or None at end of input."""
        if not self._fill():
            return None
        return self._buffer[self._index]

    # =========================================================================
    # Consumption (all position changes happen in _advance)
    # =========================================================================

    def _advance(self, actual: int) -> None:
        """Consume the current byte and move the cursor past it."""
        self._index += 1
        if actual == 0x0A:
            self._line += 1
            self._column = 1
        else:
            self._column += 1

    def _advance_while(
        self,
        predicate: Callable[[int], bool],
        into: bytearray | None = None,
    ) -> None:
        """Consume bytes while predicate holds, refilling as needed.

        Stops at end of input. When ``into`` is given, consumed bytes are
        appended to it before each refill overwrites the buffer.
        """
        buffer = self._buffer
        while self._fill():
            start = self._index
            size = self._size
            while self._index < size:
                actual = buffer[self._index]
                if not predicate(actual):
                    break
                self._advance(actual)
            if into is not None:
                into += buffer[start : self._index]
            if self._index < size:
                return

    def _advance_to_eol(self) -> None:
        """Consume up to (not including) the next newline."""
        self._advance_while(lambda c: c != 0x0A)

    def _eat(self, expected: int) -> None:
        """Consume the current byte if it is ``expected``.

        Raises:
            UnexpectedCharError: Another byte, or end of input, was found
        """
        actual = self._peek()
        if actual != expected:
            raise UnexpectedCharError(
                actual,
                bytes([expected]),
                self.pos,
                self._source_file,
            )
        self._advance(actual)
