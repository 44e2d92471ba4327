"""Tests for ContextVar-based configuration.

Validates thread isolation, context manager behavior, and that the lexer and
renderer pick up the active config.
"""

from threading import Thread

import pytest

from pluma import (
    HtmlGenerator,
    Lexer,
    Paragraph,
    PlumaConfig,
    config_context,
    get_config,
    render,
    reset_config,
    set_config,
    text,
)
from pluma.config import DEFAULT_BUFFER_SIZE
from pluma.nodes import Role, Tag, TagKind, Word, words


@pytest.fixture(autouse=True)
def _reset():
    yield
    reset_config()


class TestPlumaConfigDataclass:
    def test_default_values(self) -> None:
        config = PlumaConfig()
        assert config.buffer_size == DEFAULT_BUFFER_SIZE == 4096
        assert config.escape_html is True
        assert config.attribute_separator == " "

    def test_immutability(self) -> None:
        config = PlumaConfig()
        with pytest.raises(AttributeError):
            config.buffer_size = 1  # type: ignore[misc]

    @pytest.mark.parametrize("size", [0, -4])
    def test_rejects_non_positive_buffer(self, size: int) -> None:
        with pytest.raises(ValueError, match="buffer_size must be positive"):
            PlumaConfig(buffer_size=size)

    def test_from_dict(self) -> None:
        config = PlumaConfig.from_dict(
            {"buffer_size": 64, "attribute_separator": "", "unknown_key": 1}
        )
        assert config == PlumaConfig(buffer_size=64, attribute_separator="")

    def test_from_empty_dict(self) -> None:
        assert PlumaConfig.from_dict({}) == PlumaConfig()


class TestContextVar:
    def test_get_default(self) -> None:
        assert get_config() == PlumaConfig()

    def test_set_and_reset(self) -> None:
        set_config(PlumaConfig(escape_html=False))
        assert get_config().escape_html is False
        reset_config()
        assert get_config().escape_html is True

    def test_context_manager_restores(self) -> None:
        with config_context(PlumaConfig(buffer_size=8)):
            assert get_config().buffer_size == 8
            with config_context(PlumaConfig(buffer_size=16)):
                assert get_config().buffer_size == 16
            assert get_config().buffer_size == 8
        assert get_config().buffer_size == DEFAULT_BUFFER_SIZE

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with config_context(PlumaConfig(escape_html=False)):
                raise RuntimeError
        assert get_config().escape_html is True

    def test_thread_isolation(self) -> None:
        seen: list[PlumaConfig] = []

        def worker() -> None:
            seen.append(get_config())

        set_config(PlumaConfig(attribute_separator=""))
        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [PlumaConfig()]
        assert get_config().attribute_separator == ""


class TestConsumers:
    def test_lexer_reads_buffer_size(self) -> None:
        with config_context(PlumaConfig(buffer_size=3)):
            lexer = Lexer.from_bytes(b"abcdef")
        assert len(lexer._buffer) == 3

    def test_explicit_argument_beats_config(self) -> None:
        with config_context(PlumaConfig(buffer_size=3)):
            lexer = Lexer.from_bytes(b"x", buffer_size=10)
        assert len(lexer._buffer) == 10

    def test_generator_captures_config_at_construction(self) -> None:
        with config_context(PlumaConfig(escape_html=False)):
            generator = HtmlGenerator()
        assert render(Paragraph(text(Word("<"))), generator=generator) == (
            '<div class="paragraph"><p><</p></div>'
        )

    def test_render_uses_active_config(self) -> None:
        tag = Tag(TagKind.EMPHASIS, words("x"), (Role("a"), Role("b")))
        with config_context(PlumaConfig(attribute_separator="")):
            html = render(Paragraph(text(tag)))
        assert '<em class="a"class="b">' in html
