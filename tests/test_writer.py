"""Tests for serialization of the intermediate HTML tree."""

from __future__ import annotations

import io

import pytest

from pluma import BufferSink, RenderError, TagKind, to_bytes, to_string, write_html
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
    div_a,
    hr,
    mark,
    p,
    span_a,
)


class TestVariants:
    @pytest.mark.parametrize(
        "html,expected",
        [
            (Empty(), ""),
            (Hr(), "<hr/>"),
            (A("top"), '<a id="top"></a>'),
            (Div('class="x"', SingleTextNode("t")), '<div class="x">t</div>'),
            (Div("", Empty()), "<div></div>"),
            (P(SingleTextNode("t")), "<p>t</p>"),
            (Mark(SingleTextNode("t")), "<mark>t</mark>"),
            (Span('class="r"', SingleTextNode("t")), '<span class="r">t</span>'),
            (Span("", SingleTextNode("t")), "<span>t</span>"),
            (Element(TagKind.SUBSCRIPT, "", SingleTextNode("2")), "<sub>2</sub>"),
            (
                Element(TagKind.MONOSPACE, 'id="c"', SingleTextNode("x")),
                '<code id="c">x</code>',
            ),
            (Seq(A("a"), Hr()), '<a id="a"></a><hr/>'),
            (SingleTextNode("plain"), "plain"),
            (TextNode(()), ""),
            (
                TextNode((SingleTextNode("a"), SingleTextNode(" "), SingleTextNode("b"))),
                "a b",
            ),
        ],
    )
    def test_serialization(self, html: Html, expected: str) -> None:
        assert to_string(html) == expected

    def test_deep_nesting(self) -> None:
        html = div_a('class="o"', p(TextNode((mark(span_a("", SingleTextNode("x"))), hr()))))
        assert to_string(html) == '<div class="o"><p><mark><span>x</span></mark><hr/></p></div>'

    def test_text_written_verbatim(self) -> None:
        """The writer does not escape; text is stored ready to write."""
        assert to_string(SingleTextNode("<b>&amp;")) == "<b>&amp;"

    def test_unknown_variant(self) -> None:
        with pytest.raises(RenderError, match="cannot serialize"):
            to_string(Html())


class TestOutput:
    def test_utf8_encoding(self) -> None:
        assert to_bytes(SingleTextNode("naïve ☃")) == "naïve ☃".encode()

    def test_idempotent(self) -> None:
        html = Seq(A("a"), Element(TagKind.STRONG, "", SingleTextNode("x")))
        assert to_bytes(html) == to_bytes(html)

    def test_binary_stream_sink(self) -> None:
        out = io.BytesIO()
        write_html(P(SingleTextNode("x")), out)
        assert out.getvalue() == b"<p>x</p>"

    def test_sink_errors_propagate(self) -> None:
        class FailingSink:
            def __init__(self) -> None:
                self.writes = 0

            def write(self, data: bytes) -> None:
                self.writes += 1
                if self.writes == 2:
                    raise OSError("disk full")

        sink = FailingSink()
        with pytest.raises(OSError, match="disk full"):
            write_html(P(TextNode((SingleTextNode("a"), SingleTextNode("b")))), sink)
        assert sink.writes == 2


class TestBufferSink:
    def test_accumulates(self) -> None:
        sink = BufferSink()
        sink.write(b"<p>")
        sink.write(b"hi")
        sink.write(b"</p>")
        assert sink.build() == b"<p>hi</p>"
        assert sink.getvalue() == "<p>hi</p>"
        assert len(sink) == 3

    def test_empty_writes_skipped(self) -> None:
        sink = BufferSink()
        sink.write(b"")
        assert not sink
        assert len(sink) == 0

    def test_clear(self) -> None:
        sink = BufferSink()
        sink.write(b"x")
        assert sink
        sink.clear()
        assert sink.build() == b""
