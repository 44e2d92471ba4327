"""Delimiter scanner mixin: classification and fixed-width tokens."""

from __future__ import annotations

from pluma.tokens import SINGLE_BYTE_TOKENS, TRIPLE_APOS, TRIPLE_LT, Token

_LT = ord("<")
_APOS = ord("'")


class DelimiterScannerMixin:
    """Mixin classifying the current byte and scanning delimiter tokens.

    Fixed multi-byte delimiters (``<<<`` and ``'''``) must match exactly;
    any deviation is an UnexpectedCharError naming the byte found and the
    byte expected.

    """

    def _advance(self, actual: int) -> None:
        """Consume current byte. Implemented by Lexer."""
        raise NotImplementedError

    def _eat(self, expected: int) -> None:
        """Consume expected byte or fail. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan a word. Implemented by WordScannerMixin."""
        raise NotImplementedError

    def _classify(self, byte: int) -> Token:
        """Produce the token starting at ``byte``.

        Comments and carriage returns are handled by the caller before
        classification.
        """
        if byte == _LT:
            return self._scan_triple(_LT, TRIPLE_LT)
        if byte == _APOS:
            return self._scan_triple(_APOS, TRIPLE_APOS)
        token = SINGLE_BYTE_TOKENS.get(byte)
        if token is not None:
            self._advance(byte)
            return token
        return self._scan_word()

    def _scan_triple(self, byte: int, token: Token) -> Token:
        """Consume exactly three ``byte`` and return ``token``."""
        self._eat(byte)
        self._eat(byte)
        self._eat(byte)
        return token
