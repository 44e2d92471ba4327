"""Word scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from pluma.errors import LexerBugError
from pluma.location import Position
from pluma.tokens import WORD_DELIMITERS, Token, word
from pluma.utils.logger import get_logger

logger = get_logger(__name__)


def is_word_byte(byte: int) -> bool:
    return byte not in WORD_DELIMITERS


class WordScannerMixin:
    """Mixin scanning words: maximal runs of bytes outside WORD_DELIMITERS.

    A word can straddle buffer refills; its bytes are collected as they are
    consumed, so the token never depends on where the buffer boundary falls.

    """

    # These will be set by the Lexer class
    _source_file: str | None

    @property
    def pos(self) -> Position:
        raise NotImplementedError

    def _peek(self) -> int | None:
        """Current byte or None at end of input. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_while(
        self,
        predicate: Callable[[int], bool],
        into: bytearray | None = None,
    ) -> None:
        """Consume bytes while predicate holds. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Consume a word greedily.

        Raises:
            LexerBugError: The current byte is a delimiter, so the word would
                be empty. Nothing is consumed, the cursor is left untouched.
        """
        value = bytearray()
        self._advance_while(is_word_byte, value)
        if not value:
            actual = self._peek()
            logger.error("Word scanner entered on %r at %s", actual, self.pos)
            raise LexerBugError(actual, self.pos, self._source_file)
        return word(bytes(value))
