"""Tokenize markup and render a paragraph, zero config, zero deps."""

from pluma import Paragraph, Tag, TagKind, render, text, tokenize, words

for token in tokenize(b"Hello *World*\n"):
    print(token)

node = Paragraph(text(*words("Hello ").items, Tag(TagKind.STRONG, words("World"))))
print(render(node))
