"""Error-path tests.

Exercise error construction and formatting, and check which failures the
lexer and renderer raise on malformed input.
"""

import pytest

from pluma import Lexer, render, tokenize
from pluma.errors import (
    EndOfInput,
    LexError,
    LexerBugError,
    PlumaError,
    RenderError,
    UnexpectedCharError,
    describe_byte,
)
from pluma.location import Position
from pluma.nodes import Node

# =========================================================================
# LexError construction and formatting
# =========================================================================


class TestLexErrorFormatting:
    def test_message_only(self) -> None:
        err = LexError("bad input")
        assert str(err) == "bad input"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_position(self) -> None:
        err = LexError("bad input", Position(10, 5))
        assert str(err) == "10:5 bad input"
        assert err.lineno == 10
        assert err.col_offset == 5

    def test_with_source_file(self) -> None:
        err = LexError("bad input", Position(1, 2), source_file="doc.adoc")
        assert str(err) == "doc.adoc:1:2 bad input"

    def test_source_file_without_position(self) -> None:
        assert str(LexError("oops", source_file="doc.adoc")) == "doc.adoc oops"

    def test_hierarchy(self) -> None:
        for cls in (EndOfInput, UnexpectedCharError, LexerBugError):
            assert issubclass(cls, LexError)
        assert issubclass(LexError, PlumaError)
        assert issubclass(RenderError, PlumaError)


class TestMessages:
    def test_end_of_input(self) -> None:
        assert str(EndOfInput(Position(3, 1))) == "3:1 end of input"

    def test_unexpected_char(self) -> None:
        err = UnexpectedCharError(ord("x"), b"<", Position(1, 2))
        assert str(err) == "1:2 unexpected 'x', expected '<'"

    def test_unexpected_end_of_input(self) -> None:
        err = UnexpectedCharError(None, b"'", Position(1, 3))
        assert str(err) == "1:3 unexpected end of input, expected \"'\""

    def test_lexer_bug(self) -> None:
        err = LexerBugError(ord(" "))
        assert str(err) == "bug in the lexer, next character ' ' is not part of a word token"

    @pytest.mark.parametrize(
        "byte,expected",
        [
            (ord("a"), "'a'"),
            (0x0A, "'\\n'"),
            (0x09, "'\\t'"),
            (0x00, "0x00"),
            (0xFF, "0xff"),
            (None, "end of input"),
        ],
    )
    def test_describe_byte(self, byte: int | None, expected: str) -> None:
        assert describe_byte(byte) == expected


# =========================================================================
# Malformed input
# =========================================================================


class TestMalformedInput:
    @pytest.mark.parametrize(
        "source,line,column",
        [
            (b"<", 1, 2),
            (b"<<", 1, 3),
            (b"x\n'a", 2, 2),
            (b"''\n", 1, 3),
            (b"/", 1, 2),
            (b"a\n\n/x", 3, 2),
        ],
    )
    def test_reports_position(self, source: bytes, line: int, column: int) -> None:
        with pytest.raises(UnexpectedCharError) as exc_info:
            tokenize(source)
        assert exc_info.value.pos == Position(line, column)

    def test_tokenize_source_file(self) -> None:
        with pytest.raises(UnexpectedCharError, match=r"^notes\.adoc:1:2 "):
            tokenize(b"<", source_file="notes.adoc")

    def test_end_of_input_not_raised_by_tokenize(self) -> None:
        assert tokenize(b"") == []

    def test_end_of_input_from_next_token(self) -> None:
        lexer = Lexer.from_bytes(b"\n", source_file="a.adoc")
        lexer.next_token()
        with pytest.raises(EndOfInput) as exc_info:
            lexer.next_token()
        assert exc_info.value.pos == Position(2, 1)
        assert exc_info.value.source_file == "a.adoc"

    def test_reader_errors_propagate(self) -> None:
        class BrokenReader:
            def readinto(self, buffer: memoryview) -> int:
                raise OSError("device gone")

        with pytest.raises(OSError, match="device gone"):
            Lexer(BrokenReader()).next_token()


class TestRendererErrorPaths:
    def test_unknown_node_is_render_error(self) -> None:
        with pytest.raises(PlumaError):
            render(Node())
