"""HtmlGen protocol: the per-kind customization point of the renderer.

One method per node and item kind. ``HtmlGenerator`` implements all of them;
a backend subclasses it and overrides only the cases it wants to change.
The default traversal always dispatches through ``self``, so an overridden
case is used wherever it occurs in the tree.

Example:
    from pluma.renderers.protocol import HtmlGen

    def render_node(gen: HtmlGen, node: Node) -> Html:
        return gen.node(node)

"""

from typing import Protocol

from pluma.nodes import Attribute, Item, Node, TagKind, Text
from pluma.renderers.tree import Html


class HtmlGen(Protocol):
    """Protocol for HTML tree generators."""

    def node(self, node: Node) -> Html:
        """Dispatch a block node to its kind-specific method."""
        ...

    def horizontal_rule(self) -> Html: ...

    def page_break(self) -> Html: ...

    def paragraph(self, text: Text) -> Html: ...

    def text(self, text: Text) -> Html: ...

    def item(self, item: Item) -> Html:
        """Dispatch an inline item to its kind-specific method."""
        ...

    def word(self, text: str) -> Html: ...

    def space(self) -> Html: ...

    def mark(self, text: Text, attributes: tuple[Attribute, ...]) -> Html: ...

    def tag(self, kind: TagKind, text: Text, attributes: tuple[Attribute, ...]) -> Html: ...
