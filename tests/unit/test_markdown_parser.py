#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for Markdown to AST conversion.

Tests cover:
- Block structure (headings, paragraphs, lists, code, quotes, HTML)
- Inline formatting, links and autolinks, breaks
- GFM extensions and their option switches
- YAML front matter and pandoc title blocks
- Input types

"""

import io
from pathlib import Path

import pytest

from md2vim.ast import (
    AutoLink,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
    TitleBlock,
)
from md2vim.exceptions import FileNotFoundError as Md2VimFileNotFoundError
from md2vim.exceptions import InvalidOptionsError
from md2vim.options import MarkdownParserOptions, VimDocOptions
from md2vim.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


def _inlines(markdown: str) -> list:
    doc = markdown_to_ast(markdown)
    assert isinstance(doc.children[0], Paragraph)
    return doc.children[0].content


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level structure."""

    def test_heading_and_paragraph(self) -> None:
        doc = markdown_to_ast("# Title\n\nThis is **bold** text.")
        assert isinstance(doc, Document)
        heading, paragraph = doc.children
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.content == [Text(content="Title")]
        assert isinstance(paragraph, Paragraph)
        assert isinstance(paragraph.content[1], Strong)

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level: int) -> None:
        doc = markdown_to_ast("#" * level + " H")
        assert doc.children[0].level == level

    def test_ordered_list(self) -> None:
        doc = markdown_to_ast("1. a\n2. b\n")
        lst = doc.children[0]
        assert isinstance(lst, List)
        assert lst.ordered is True
        assert len(lst.items) == 2
        assert isinstance(lst.items[0].children[0], Paragraph)

    def test_unordered_nested_list(self) -> None:
        doc = markdown_to_ast("- a\n  - b\n- c\n")
        lst = doc.children[0]
        assert lst.ordered is False
        assert len(lst.items) == 2
        assert isinstance(lst.items[0].children[-1], List)

    def test_fenced_code_block(self) -> None:
        doc = markdown_to_ast("```python\nx = 1\n```\n")
        block = doc.children[0]
        assert isinstance(block, CodeBlock)
        assert block.content == "x = 1\n"
        assert block.language == "python"

    def test_code_block_without_language(self) -> None:
        block = markdown_to_ast("```\nx\n```\n").children[0]
        assert block.language is None

    def test_block_quote(self) -> None:
        quote = markdown_to_ast("> quoted\n").children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_thematic_break(self) -> None:
        doc = markdown_to_ast("a\n\n***\n\nb\n")
        assert isinstance(doc.children[1], ThematicBreak)

    def test_html_block(self) -> None:
        doc = markdown_to_ast("<div>\nx\n</div>\n")
        assert isinstance(doc.children[0], HTMLBlock)
        assert "<div>" in doc.children[0].content


@pytest.mark.unit
class TestInlines:
    """Tests for inline structure."""

    def test_emphasis_and_code(self) -> None:
        content = _inlines("*a* `b`")
        assert isinstance(content[0], Emphasis)
        assert isinstance(content[-1], Code)
        assert content[-1].content == "b"

    def test_link(self) -> None:
        link = _inlines("[site](http://example.com)")[0]
        assert isinstance(link, Link)
        assert link.url == "http://example.com"
        assert link.content == [Text(content="site")]

    def test_link_with_url_text_is_still_a_link_when_urls_differ(self) -> None:
        link = _inlines("[http://a.com](http://b.com)")[0]
        assert isinstance(link, Link)

    def test_url_autolink(self) -> None:
        link = _inlines("<https://example.com>")[0]
        assert link == AutoLink(url="https://example.com", text="https://example.com")

    def test_email_autolink(self) -> None:
        link = _inlines("<me@example.com>")[0]
        assert isinstance(link, AutoLink)
        assert link.text == "me@example.com"
        assert link.url == "mailto:me@example.com"

    def test_image(self) -> None:
        image = _inlines("![alt](pic.png)")[0]
        assert isinstance(image, Image)
        assert image.url == "pic.png"
        assert image.alt_text == "alt"

    def test_hard_break(self) -> None:
        content = _inlines("a  \nb")
        assert LineBreak(soft=False) in content

    def test_soft_break(self) -> None:
        content = _inlines("a\nb")
        assert LineBreak(soft=True) in content

    def test_inline_html(self) -> None:
        content = _inlines("press <kbd>x</kbd>")
        assert any(isinstance(node, HTMLInline) for node in content)


@pytest.mark.unit
class TestExtensions:
    """Tests for GFM extensions and their switches."""

    TABLE = "| a | b |\n|---|---|\n| 1 | 2 |\n"

    def test_table(self) -> None:
        table = markdown_to_ast(self.TABLE).children[0]
        assert isinstance(table, Table)
        assert table.header is not None
        assert len(table.header.cells) == 2
        assert len(table.rows) == 1

    def test_tables_disabled(self) -> None:
        doc = markdown_to_ast(self.TABLE, MarkdownParserOptions(parse_tables=False))
        assert not any(isinstance(node, Table) for node in doc.children)

    def test_strikethrough(self) -> None:
        assert isinstance(_inlines("~~gone~~")[0], Strikethrough)

    def test_strikethrough_disabled(self) -> None:
        doc = markdown_to_ast("~~gone~~", MarkdownParserOptions(parse_strikethrough=False))
        assert not any(isinstance(node, Strikethrough) for node in doc.children[0].content)

    def test_footnotes(self) -> None:
        doc = markdown_to_ast("text[^1]\n\n[^1]: the note\n")
        assert FootnoteReference(identifier="1") in doc.children[0].content
        definitions = [node for node in doc.children if isinstance(node, FootnoteDefinition)]
        assert [d.identifier for d in definitions] == ["1"]


@pytest.mark.unit
class TestDocumentPreamble:
    """Tests for front matter and title blocks."""

    def test_yaml_front_matter(self) -> None:
        doc = markdown_to_ast("---\ntitle: Tool\ndescription: Does things\n---\n# H\n")
        assert doc.metadata == {"title": "Tool", "description": "Does things"}
        assert isinstance(doc.children[0], Heading)

    def test_front_matter_disabled(self) -> None:
        doc = markdown_to_ast("---\ntitle: Tool\n---\n# H\n", MarkdownParserOptions(parse_frontmatter=False))
        assert doc.metadata == {}

    def test_malformed_front_matter_is_dropped(self) -> None:
        doc = markdown_to_ast("---\nkey: [unclosed\n---\n# H\n")
        assert doc.metadata == {}
        assert isinstance(doc.children[0], Heading)

    def test_unterminated_front_matter_is_content(self) -> None:
        doc = markdown_to_ast("---\n\nText\n")
        assert doc.metadata == {}

    def test_title_block(self) -> None:
        doc = markdown_to_ast("% My Title\n% Author\n\n# H\n")
        assert doc.children[0] == TitleBlock(lines=["My Title", "Author"])
        assert isinstance(doc.children[1], Heading)


@pytest.mark.unit
class TestInputs:
    """Tests for the accepted input types."""

    def test_bytes(self) -> None:
        doc = MarkdownToAstConverter().parse(b"# Title\n")
        assert isinstance(doc.children[0], Heading)

    def test_binary_stream(self) -> None:
        doc = MarkdownToAstConverter().parse(io.BytesIO(b"# Title\n"))
        assert isinstance(doc.children[0], Heading)

    def test_path(self, tmp_path: Path) -> None:
        path = tmp_path / "README.md"
        path.write_text("# Title\n", encoding="utf-8")
        assert isinstance(MarkdownToAstConverter().parse(path).children[0], Heading)
        assert isinstance(MarkdownToAstConverter().parse(str(path)).children[0], Heading)

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(Md2VimFileNotFoundError):
            MarkdownToAstConverter().parse(tmp_path / "missing.md")

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(VimDocOptions())
