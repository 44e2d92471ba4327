"""Depth-first serialization of the intermediate HTML tree.

``write_html`` is a pure function of the tree: writing the same tree twice
produces the same bytes. Sink errors propagate immediately and abort the
rest of the write.
"""

from __future__ import annotations

from pluma.errors import RenderError
from pluma.renderers.tree import (
    A,
    Div,
    Element,
    Empty,
    Hr,
    Html,
    Mark,
    P,
    Seq,
    SingleTextNode,
    Span,
    TextNode,
)
from pluma.sink import BufferSink, Sink


def write_html(html: Html, sink: Sink) -> None:
    """Write ``html`` to ``sink`` as UTF-8."""
    match html:
        case Empty():
            pass
        case Hr():
            _write_text("<hr/>", sink)
        case A(id=anchor_id):
            _write_text(f'<a id="{anchor_id}"></a>', sink)
        case Div(attributes=attributes, child=child):
            _write_tag("div", attributes, child, sink)
        case P(child=child):
            _write_tag("p", "", child, sink)
        case Mark(child=child):
            _write_tag("mark", "", child, sink)
        case Span(attributes=attributes, child=child):
            _write_tag("span", attributes, child, sink)
        case Element(tag=tag, attributes=attributes, child=child):
            _write_tag(tag.value, attributes, child, sink)
        case Seq(first=first, second=second):
            write_html(first, sink)
            write_html(second, sink)
        case SingleTextNode(text=text):
            _write_text(text, sink)
        case TextNode(children=children):
            for child in children:
                write_html(child, sink)
        case _:
            raise RenderError(f"cannot serialize {type(html).__name__}")


def to_bytes(html: Html) -> bytes:
    """Serialize ``html`` into a byte string."""
    sink = BufferSink()
    write_html(html, sink)
    return sink.build()


def to_string(html: Html) -> str:
    """Serialize ``html`` into a str."""
    return to_bytes(html).decode("utf-8")


def _write_tag(name: str, attributes: str, child: Html, sink: Sink) -> None:
    if attributes:
        _write_text(f"<{name} {attributes}>", sink)
    else:
        _write_text(f"<{name}>", sink)
    write_html(child, sink)
    _write_text(f"</{name}>", sink)


def _write_text(text: str, sink: Sink) -> None:
    sink.write(text.encode("utf-8"))
