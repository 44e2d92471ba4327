"""Buffered byte-stream lexer for Pluma markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ByteSource
├── core.py              # Lexer class (buffer, cursor, dispatch loop)
└── scanners/
    ├── comment.py       # // line and //// block comments
    ├── delimiter.py     # Classification, <<< and ''' tokens
    └── word.py          # Greedy word runs

Usage:
    >>> from pluma.lexer import Lexer
    >>> with open("doc.adoc", "rb") as f:
    ...     for token in Lexer(f, source_file="doc.adoc").tokenize():
    ...         print(token)

"""

from pluma.lexer.core import ByteSource, Lexer

__all__ = ["ByteSource", "Lexer"]
