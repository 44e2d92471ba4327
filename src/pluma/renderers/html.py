"""Default HTML generator.

Turns document nodes into the intermediate HTML tree. Every node and item
kind has its own method; subclasses override single cases and inherit the
rest of the traversal:

    class StrictGenerator(HtmlGenerator):
        def page_break(self) -> Html:
            return div_a('class="page-break"', Empty())

    html = render(node, generator=StrictGenerator())

Tree construction does no I/O. ``gen`` and the render helpers build the tree
once and serialize it to a sink in a single depth-first write.

Thread Safety:
Generators hold only immutable options. A single HtmlGenerator instance can
be shared by concurrent renders.
"""

from __future__ import annotations

from collections.abc import Iterable

from pluma import nodes
from pluma.config import get_config
from pluma.errors import RenderError
from pluma.nodes import Attribute, Item, Node, TagKind, Text
from pluma.renderers.protocol import HtmlGen
from pluma.renderers.tree import (
    A,
    Element,
    Empty,
    Html,
    Seq,
    SingleTextNode,
    TextNode,
    div_a,
    hr,
    mark,
    p,
    span_a,
)
from pluma.renderers.writer import write_html
from pluma.sink import BufferSink, Sink
from pluma.utils.logger import get_logger
from pluma.utils.text import escape_html, escape_text

logger = get_logger(__name__)

PAGE_BREAK_STYLE = "page-break-after: always;"
PARAGRAPH_CLASS = "paragraph"


class HtmlGenerator:
    """Default generator: one overridable method per node and item kind.

    Usage:
        >>> from pluma.nodes import Paragraph, words
        >>> render(Paragraph(words("hi")), generator=HtmlGenerator())
        '<div class="paragraph"><p>hi</p></div>'

    """

    def __init__(
        self,
        *,
        escape: bool | None = None,
        attribute_separator: str | None = None,
    ) -> None:
        """Initialize generator.

        Args:
            escape: HTML-escape word text and attribute values
                (defaults to the active config)
            attribute_separator: String placed between attributes
                (defaults to the active config)
        """
        config = get_config()
        self._escape = config.escape_html if escape is None else escape
        self._separator = (
            config.attribute_separator if attribute_separator is None else attribute_separator
        )

    # =========================================================================
    # Block nodes
    # =========================================================================

    def node(self, node: Node) -> Html:
        """Dispatch a block node."""
        match node:
            case nodes.HorizontalRule():
                return self.horizontal_rule()
            case nodes.PageBreak():
                return self.page_break()
            case nodes.Paragraph(text=text):
                return self.paragraph(text)
            case _:
                raise RenderError(f"unknown node kind: {type(node).__name__}")

    def horizontal_rule(self) -> Html:
        return hr()

    def page_break(self) -> Html:
        return div_a(self.attr(style=PAGE_BREAK_STYLE), Empty())

    def paragraph(self, text: Text) -> Html:
        return div_a(self.attr(**{"class": PARAGRAPH_CLASS}), p(self.text(text)))

    # =========================================================================
    # Inline items
    # =========================================================================

    def text(self, text: Text) -> Html:
        """One child per item, in order."""
        return TextNode(tuple(self.item(item) for item in text.items))

    def item(self, item: Item) -> Html:
        """Dispatch an inline item."""
        match item:
            case nodes.Word(text=word):
                return self.word(word)
            case nodes.Space():
                return self.space()
            case nodes.Mark(text=text, attributes=attributes):
                return self.mark(text, attributes)
            case nodes.Tag(kind=kind, text=text, attributes=attributes):
                return self.tag(kind, text, attributes)
            case _:
                raise RenderError(f"unknown item kind: {type(item).__name__}")

    def word(self, text: str) -> Html:
        return SingleTextNode(escape_text(text) if self._escape else text)

    def space(self) -> Html:
        return SingleTextNode(" ")

    def mark(self, text: Text, attributes: tuple[Attribute, ...]) -> Html:
        """Render highlighted text.

        Without attributes this is a <mark>. Any attribute turns it into a
        styled <span> instead; an Id becomes an anchor before the span.
        """
        inner = self.text(text)
        if not attributes:
            return mark(inner)
        anchor_id, rest = self._take_id(attributes)
        return self._anchored(anchor_id, span_a(self.attributes_to_string(rest), inner))

    def tag(self, kind: TagKind, text: Text, attributes: tuple[Attribute, ...]) -> Html:
        """Render a generic tagged span, preceded by an anchor for its Id."""
        inner = self.text(text)
        anchor_id, rest = self._take_id(attributes)
        return self._anchored(anchor_id, Element(kind, self.attributes_to_string(rest), inner))

    # =========================================================================
    # Attributes
    # =========================================================================

    def attr(self, **pairs: str) -> str:
        """Format ``name="value"`` pairs in keyword order."""
        return self._separator.join(
            f'{name}="{self._attribute_value(value)}"' for name, value in pairs.items()
        )

    def attributes_to_string(self, attributes: Iterable[Attribute]) -> str:
        """Format document attributes: Id as ``id``, Role as ``class``."""
        parts = []
        for attribute in attributes:
            match attribute:
                case nodes.Id(value=value):
                    parts.append(f'id="{self._attribute_value(value)}"')
                case nodes.Role(value=value):
                    parts.append(f'class="{self._attribute_value(value)}"')
                case _:
                    raise RenderError(f"unknown attribute kind: {type(attribute).__name__}")
        return self._separator.join(parts)

    def _attribute_value(self, value: str) -> str:
        return escape_html(value) if self._escape else value

    def _take_id(
        self, attributes: tuple[Attribute, ...]
    ) -> tuple[str | None, tuple[Attribute, ...]]:
        """Split off the anchor id; the id must appear exactly once in output.

        Returns:
            (first Id value or None, attributes without any Id)
        """
        anchor_id = find_id_attribute(attributes)
        if anchor_id is None:
            return None, attributes
        rest = tuple(a for a in attributes if not isinstance(a, nodes.Id))
        if len(attributes) - len(rest) > 1:
            logger.warning("Multiple ids on one element; keeping %r", anchor_id)
        return anchor_id, rest

    def _anchored(self, anchor_id: str | None, element: Html) -> Html:
        if anchor_id is None:
            return element
        return Seq(A(self._attribute_value(anchor_id)), element)


def find_id_attribute(attributes: Iterable[Attribute]) -> str | None:
    """Value of the first Id attribute, if any."""
    for attribute in attributes:
        if isinstance(attribute, nodes.Id):
            return attribute.value
    return None


# =============================================================================
# Entry points
# =============================================================================


def gen(generator: HtmlGen, node: Node, sink: Sink) -> None:
    """Write the HTML for ``node``, as built by ``generator``, to ``sink``."""
    html = generator.node(node)
    write_html(html, sink)


def render_to(node: Node, sink: Sink, *, generator: HtmlGen | None = None) -> None:
    """Render one node into ``sink`` with the default or given generator."""
    gen(generator or HtmlGenerator(), node, sink)


def render(node: Node, *, generator: HtmlGen | None = None) -> str:
    """Render one node to an HTML fragment.

    Example:
        >>> render(nodes.HorizontalRule())
        '<hr/>'
    """
    sink = BufferSink()
    render_to(node, sink, generator=generator)
    return sink.getvalue()


def render_many(document: Iterable[Node], *, generator: HtmlGen | None = None) -> str:
    """Render nodes in order and concatenate the fragments.

    No <html>/<body> wrapper is added.
    """
    generator = generator or HtmlGenerator()
    sink = BufferSink()
    for node in document:
        gen(generator, node, sink)
    return sink.getvalue()

