"""Typed document nodes consumed by the Pluma renderer.

The parser (external to this package) builds these from the token stream;
the HTML generator walks them.

All nodes are frozen dataclasses with slots for:
- Immutability: safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (block-level)
├── HorizontalRule
├── PageBreak
└── Paragraph
Item (inline, inside a Text)
├── Word
├── Space
├── Mark
└── Tag
Attribute
├── Id
└── Role

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# =============================================================================
# Attributes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Attribute:
    """Base class for element attributes."""


@dataclass(frozen=True, slots=True)
class Id(Attribute):
    """Unique anchor target.

    Markup: [#intro]#text#
    HTML: <a id="intro"></a> before the element

    """

    value: str


@dataclass(frozen=True, slots=True)
class Role(Attribute):
    """Styling class.

    Markup: [.lead]#text#
    HTML: class="lead"

    """

    value: str


class TagKind(Enum):
    """Generic inline tags. The value is the HTML tag name."""

    STRONG = "strong"  # *text*
    EMPHASIS = "em"  # _text_
    MONOSPACE = "code"  # `text`
    SUPERSCRIPT = "sup"  # ^text^
    SUBSCRIPT = "sub"  # ~text~

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Inline items
# =============================================================================


@dataclass(frozen=True, slots=True)
class Item:
    """Base class for inline items."""


@dataclass(frozen=True, slots=True)
class Text:
    """Ordered run of inline items."""

    items: tuple[Item, ...] = ()


@dataclass(frozen=True, slots=True)
class Word(Item):
    """Literal word."""

    text: str


@dataclass(frozen=True, slots=True)
class Space(Item):
    """A single space between words."""


@dataclass(frozen=True, slots=True)
class Mark(Item):
    """Highlighted text.

    Markup: #text#
    HTML: <mark>text</mark>, or a span when attributes are present

    """

    text: Text
    attributes: tuple[Attribute, ...] = field(default=())


@dataclass(frozen=True, slots=True)
class Tag(Item):
    """Generic tagged span (strong, emphasis, monospace, ...)."""

    kind: TagKind
    text: Text
    attributes: tuple[Attribute, ...] = field(default=())


# =============================================================================
# Block nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for block-level nodes."""


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Thematic break.

    Markup: '''
    HTML: <hr/>

    """


@dataclass(frozen=True, slots=True)
class PageBreak(Node):
    """Forced page break.

    Markup: <<<

    """


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of inline text."""

    text: Text


def text(*items: Item) -> Text:
    """Build a Text from items."""
    return Text(items=tuple(items))


def words(sentence: str) -> Text:
    """Build a Text of Word and Space items from a plain sentence.

    Example:
        >>> words("hi there")
        Text(items=(Word(text='hi'), Space(), Word(text='there')))
    """
    items: list[Item] = []
    for i, part in enumerate(sentence.split(" ")):
        if i:
            items.append(Space())
        if part:
            items.append(Word(part))
    return Text(items=tuple(items))
