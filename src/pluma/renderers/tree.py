"""Intermediate HTML tree.

The generator builds this tree bottom-up from document nodes; the writer
serializes it depth-first. The tree is never mutated after construction and
every composite node exclusively owns its children (no sharing, no cycles).

Text and attribute strings are stored ready to write: any escaping has
already happened when the tree was built.

Thread Safety:
All variants are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from pluma.nodes import TagKind


@dataclass(frozen=True, slots=True)
class Html:
    """Base class for intermediate HTML nodes."""


@dataclass(frozen=True, slots=True)
class Empty(Html):
    """Writes nothing."""


@dataclass(frozen=True, slots=True)
class Hr(Html):
    """<hr/>"""


@dataclass(frozen=True, slots=True)
class A(Html):
    """Empty anchor target: <a id="..."></a>"""

    id: str


@dataclass(frozen=True, slots=True)
class Div(Html):
    attributes: str
    child: Html


@dataclass(frozen=True, slots=True)
class P(Html):
    child: Html


@dataclass(frozen=True, slots=True)
class Mark(Html):
    child: Html


@dataclass(frozen=True, slots=True)
class Span(Html):
    attributes: str
    child: Html


@dataclass(frozen=True, slots=True)
class Element(Html):
    """Generic inline tag named by its TagKind."""

    tag: TagKind
    attributes: str
    child: Html


@dataclass(frozen=True, slots=True)
class Seq(Html):
    """Two siblings written one after the other."""

    first: Html
    second: Html


@dataclass(frozen=True, slots=True)
class SingleTextNode(Html):
    text: str


@dataclass(frozen=True, slots=True)
class TextNode(Html):
    """Run of siblings, one per inline item."""

    children: tuple[Html, ...]


# =============================================================================
# Builders
# =============================================================================


def div_a(attributes: str, child: Html) -> Html:
    """Create a div element with attributes."""
    return Div(attributes, child)


def hr() -> Html:
    """Create a hr element."""
    return Hr()


def mark(child: Html) -> Html:
    """Create a mark element."""
    return Mark(child)


def p(child: Html) -> Html:
    """Create a p element."""
    return P(child)


def span_a(attributes: str, child: Html) -> Html:
    """Create a span element with attributes."""
    return Span(attributes, child)
