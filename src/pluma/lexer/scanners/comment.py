"""Comment scanner mixin.

Line comments start with ``//`` and run to the end of the line. Block
comments start with a line opening with ``///`` and run until a line made of
exactly four slashes::

    ////
    everything here is discarded
    ////

Comments never produce tokens. The newline ending a line comment, or the
closing ``////`` line, is left for the tokenizer.
"""

from __future__ import annotations

from pluma.utils.logger import get_logger

logger = get_logger(__name__)

_SLASH = ord("/")
_NEWLINE = ord("\n")
_CR = ord("\r")

COMMENT_DELIMITER_WIDTH = 4


class CommentScannerMixin:
    """Mixin skipping line and block comments.

    The block comment terminator is found with a bounded scan: each slash is
    peeked and consumed through the refilling cursor, so the search never
    looks past the valid region of the buffer, wherever the buffer boundary
    falls.

    """

    def _peek(self) -> int | None:
        """Current byte or None at end of input. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self, actual: int) -> None:
        """Consume current byte. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to_eol(self) -> None:
        """Consume up to the next newline. Implemented by Lexer."""
        raise NotImplementedError

    def _eat(self, expected: int) -> None:
        """Consume expected byte or fail. Implemented by Lexer."""
        raise NotImplementedError

    def _skip_comment(self) -> None:
        """Skip a comment starting at the current ``/``.

        Raises:
            UnexpectedCharError: A single ``/`` not followed by another
        """
        self._eat(_SLASH)
        self._eat(_SLASH)
        if self._peek() == _SLASH:
            self._skip_block_comment()
        else:
            self._advance_to_eol()

    def _skip_block_comment(self) -> None:
        """Skip whole lines up to and including the closing ``////``.

        An unterminated block comment runs to the end of input.
        """
        # Rest of the opening line
        self._advance_to_eol()
        lines = 0
        while self._peek() is not None:
            self._eat(_NEWLINE)
            if self._at_comment_delimiter():
                logger.debug("Skipped block comment of %d line(s)", lines)
                return
            self._advance_to_eol()
            lines += 1
        logger.debug("Block comment ran to end of input")

    def _at_comment_delimiter(self) -> bool:
        """Consume leading slashes of a line; True if it is exactly ``////``.

        At most one slash beyond the delimiter width is consumed. A line that
        is not a delimiter is inside the comment, so consuming part of it is
        harmless; the caller skips the rest.
        """
        count = 0
        while count <= COMMENT_DELIMITER_WIDTH:
            byte = self._peek()
            if byte != _SLASH:
                return count == COMMENT_DELIMITER_WIDTH and byte in (None, _NEWLINE, _CR)
            self._advance(byte)
            count += 1
        return False
