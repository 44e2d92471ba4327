"""Pluma renderers.

Renderers convert document nodes into HTML in two steps: build an
intermediate tree (``HtmlGenerator``), then serialize it (``write_html``).

Thread Safety:
Trees are immutable and generators hold only immutable options.
Safe for concurrent use from multiple threads.

"""

from pluma.renderers.html import (
    HtmlGenerator,
    find_id_attribute,
    gen,
    render,
    render_many,
    render_to,
)
from pluma.renderers.protocol import HtmlGen
from pluma.renderers.writer import to_bytes, to_string, write_html

__all__ = [
    "HtmlGen",
    "HtmlGenerator",
    "find_id_attribute",
    "gen",
    "render",
    "render_many",
    "render_to",
    "to_bytes",
    "to_string",
    "write_html",
]
