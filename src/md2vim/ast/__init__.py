#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The AST separates Markdown parsing from vimdoc rendering: the parser builds
a tree of the nodes defined in :mod:`md2vim.ast.nodes`, and renderers walk
it through :class:`~md2vim.ast.visitors.NodeVisitor`.

Examples
--------
Build a tree by hand and render it:

    >>> from md2vim.ast import Document, Heading, Paragraph, Text
    >>> from md2vim.renderers.vimdoc import VimDocRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Intro")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> text = VimDocRenderer("demo.txt").render_to_string(doc)

"""

from __future__ import annotations

from md2vim.ast.nodes import (
    Alignment,
    AutoLink,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Entity,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    TitleBlock,
)
from md2vim.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "AutoLink",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Entity",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "TitleBlock",
]
