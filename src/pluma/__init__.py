"""
Pluma: lexer and HTML renderer for lightweight AsciiDoc-style markup

Two independent halves of a markup-to-HTML converter:

- ``Lexer`` turns a byte stream into classified tokens, tracking line and
  column as it goes.
- ``HtmlGenerator`` turns parsed document nodes into an HTML tree, which is
  written depth-first to any byte sink.

The parser joining the two is supplied by the caller.

Quick Start:
    >>> from pluma import tokenize
    >>> tokenize(b"*bold* text\\n")
    [Token(STAR, b'*'), Token(WORD, b'bold'), Token(STAR, b'*'), Token(SPACE, b' '), Token(WORD, b'text'), Token(NEW_LINE, b'\\n')]

    >>> from pluma import Paragraph, render, words
    >>> render(Paragraph(words("hi")))
    '<div class="paragraph"><p>hi</p></div>'

Custom backends override single cases and keep the default traversal:
    >>> from pluma import HtmlGenerator, HorizontalRule
    >>> from pluma.renderers.tree import SingleTextNode
    >>> class PlainRules(HtmlGenerator):
    ...     def horizontal_rule(self):
    ...         return SingleTextNode("<hr>")
    >>> render(HorizontalRule(), generator=PlainRules())
    '<hr>'
"""

import io
from typing import BinaryIO

from pluma.config import (
    PlumaConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from pluma.errors import (
    EndOfInput,
    LexError,
    LexerBugError,
    PlumaError,
    RenderError,
    UnexpectedCharError,
)
from pluma.lexer import ByteSource, Lexer
from pluma.location import Position
from pluma.nodes import (
    Attribute,
    HorizontalRule,
    Id,
    Item,
    Mark,
    Node,
    PageBreak,
    Paragraph,
    Role,
    Space,
    Tag,
    TagKind,
    Text,
    Word,
    text,
    words,
)
from pluma.renderers import (
    HtmlGen,
    HtmlGenerator,
    gen,
    render,
    render_many,
    render_to,
    to_bytes,
    to_string,
    write_html,
)
from pluma.sink import BufferSink, Sink
from pluma.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: bytes | str | BinaryIO,
    *,
    source_file: str | None = None,
    buffer_size: int | None = None,
) -> list[Token]:
    """Tokenize markup into a list of tokens.

    Args:
        source: Markup as bytes, str (encoded as UTF-8) or a binary stream
        source_file: Optional source file path for error messages
        buffer_size: Lexer read buffer size (defaults to the active config)

    Returns:
        All tokens up to end of input

    Raises:
        UnexpectedCharError: Malformed ``<<<``, ``'''`` or ``//`` sequence
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    lexer = Lexer(source, source_file=source_file, buffer_size=buffer_size)
    return list(lexer.tokenize())


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "render",
    "render_many",
    "render_to",
    # Lexer
    "ByteSource",
    "Lexer",
    "Position",
    "Token",
    "TokenType",
    # Document nodes
    "Attribute",
    "HorizontalRule",
    "Id",
    "Item",
    "Mark",
    "Node",
    "PageBreak",
    "Paragraph",
    "Role",
    "Space",
    "Tag",
    "TagKind",
    "Text",
    "Word",
    "text",
    "words",
    # Renderer
    "HtmlGen",
    "HtmlGenerator",
    "gen",
    "to_bytes",
    "to_string",
    "write_html",
    # Sinks
    "BufferSink",
    "Sink",
    # Errors
    "PlumaError",
    "LexError",
    "EndOfInput",
    "UnexpectedCharError",
    "LexerBugError",
    "RenderError",
    # Configuration (ContextVar-based)
    "PlumaConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
]
