"""Scanners for the Pluma lexer.

Each scanner is a mixin that consumes one kind of lexical unit through the
Lexer's cursor primitives (_peek, _advance, _eat).
"""

from __future__ import annotations

from pluma.lexer.scanners.comment import CommentScannerMixin
from pluma.lexer.scanners.delimiter import DelimiterScannerMixin
from pluma.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "DelimiterScannerMixin",
    "WordScannerMixin",
]
