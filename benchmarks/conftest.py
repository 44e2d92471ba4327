"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from pluma import Mark, Paragraph, Role, Space, Tag, TagKind, Word, text


@pytest.fixture
def large_source() -> bytes:
    """Generate a large markup document (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(
            f"Paragraph {i} with *bold*, _emphasis_ and `code` words.\n"
            f"// comment {i}\n"
            "[#anchor.role]#highlighted# text ^sup^ ~sub~\n"
            "'''\n"
        )
        if i % 50 == 0:
            sections.append("////\nblock comment\n////\n<<<\n")
    return "".join(sections).encode("utf-8")


@pytest.fixture
def large_document() -> list[Paragraph]:
    """Generate a document of 1000 styled paragraphs."""
    items = (
        Word("Some"),
        Space(),
        Tag(TagKind.STRONG, text(Word("bold"))),
        Space(),
        Mark(text(Word("marked")), (Role("lead"),)),
        Space(),
        Word("a<b"),
    )
    return [Paragraph(text(*items)) for _ in range(1000)]
