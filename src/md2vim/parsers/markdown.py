#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown documents to the md2vim AST
using the mistune parser. mistune is run without a renderer so that it
returns its token stream, and the tokens are mapped onto AST nodes here.

Two source conventions are handled before mistune sees the text:

- YAML front matter between ``---`` lines, stored in ``Document.metadata``
- a pandoc title block (``% title`` lines at the top), kept as a TitleBlock

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

import mistune
import yaml

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
from md2vim.constants import TITLE_BLOCK_PREFIX
from md2vim.exceptions import ParsingError
from md2vim.options.markdown import MarkdownParserOptions
from md2vim.parsers.base import BaseParser

logger = logging.getLogger(__name__)

_MAILTO = "mailto:"


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic usage:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Title\n\nThis is **bold** text.")
        >>> [type(node).__name__ for node in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        metadata: dict[str, Any] = {}
        if self.options.parse_frontmatter:
            markdown_content, metadata = self._extract_frontmatter(markdown_content)

        markdown_content, title_block = self._extract_title_block(markdown_content)

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")

        # No renderer: parse() returns the token list
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        try:
            tokens, state = markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(
                f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e
            ) from e

        children: list[Node] = []
        if title_block is not None:
            children.append(title_block)
        if isinstance(tokens, list):
            children.extend(self._process_tokens(tokens))

        # Without a renderer mistune leaves footnote bodies in the parser env
        footnotes = state.env.get("ref_footnotes") or {}
        for identifier, text in footnotes.items():
            children.append(
                FootnoteDefinition(identifier=identifier, content=[Paragraph(content=[Text(content=text.strip())])])
            )

        logger.debug(f"Parsed Markdown into {len(children)} top-level nodes")
        return Document(children=children, metadata=metadata)

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Strip YAML front matter (``---`` ... ``---``) from the content.

        Parameters
        ----------
        content : str
            Markdown content

        Returns
        -------
        tuple[str, dict]
            (remaining_content, metadata); metadata is empty when there is
            no front matter or it is not a YAML mapping

        """
        if not (content.startswith("---\n") or content.startswith("---\r\n")):
            return content, {}

        lines = content.splitlines(keepends=True)
        end_index = -1
        for i in range(1, len(lines)):
            if lines[i].strip() == "---":
                end_index = i
                break

        if end_index <= 0:
            return content, {}

        yaml_content = "".join(lines[1:end_index])
        remaining_content = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring malformed YAML front matter: {e}")
            return remaining_content, {}

        if not isinstance(data, dict):
            return remaining_content, {}
        return remaining_content, {str(key): value for key, value in data.items()}

    def _extract_title_block(self, content: str) -> tuple[str, TitleBlock | None]:
        """Strip a pandoc title block (up to three ``%`` lines) from the top."""
        lines = content.splitlines(keepends=True)
        title_lines: list[str] = []
        for line in lines[:3]:
            if not line.startswith(TITLE_BLOCK_PREFIX):
                break
            title_lines.append(line[len(TITLE_BLOCK_PREFIX) :].strip())

        if not title_lines:
            return content, None
        return "".join(lines[len(title_lines) :]), TitleBlock(lines=title_lines)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes

        """
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block-level mistune token into an AST node."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        # blank_line and anything unknown
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level, optional id) and 'children'

        Returns
        -------
        Heading
            Heading AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        metadata: dict[str, Any] = {}
        if attrs.get("id"):
            metadata["id"] = attrs["id"]

        content = self._process_inline_tokens(token.get("children", []))
        return Heading(level=level, content=content, metadata=metadata)

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token; the first word of the info string is the language."""
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        language = None
        metadata: dict[str, Any] = {}
        if info_string and info_string.strip():
            info_string = info_string.strip()
            metadata["info_string"] = info_string
            language = info_string.split(maxsplit=1)[0]

        return CodeBlock(content=token.get("raw", ""), language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict)
        ]
        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token (table_head and table_body children)."""
        header = None
        rows = []
        alignments = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_cells(section)
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token)))

        return Table(rows=rows, header=header, alignments=alignments)

    def _process_table_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        cells = []
        for cell_token in row_token.get("children", []):
            if cell_token.get("type") != "table_cell":
                continue
            attrs = cell_token.get("attrs", {})
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    alignment=attrs.get("align") if isinstance(attrs, dict) else None,
                )
            )
        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        if not isinstance(tokens, list):
            return []

        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link | AutoLink:
        """Handle link token.

        ``<https://example.com>`` and ``<user@example.com>`` reach us as
        ordinary links whose text is the URL (or the URL minus ``mailto:``);
        those become AutoLink nodes.
        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        url = attrs.get("url", "")
        title = attrs.get("title", None)
        content = self._process_inline_tokens(token.get("children", []))

        if len(content) == 1 and isinstance(content[0], Text):
            text = content[0].content
            if text == url or _MAILTO + text == url:
                return AutoLink(url=url, text=text)

        return Link(url=url, content=content, title=title)

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; alt text is carried by the text children."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        alt_parts = [
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        ]
        return Image(url=attrs.get("url", ""), alt_text="".join(alt_parts), title=attrs.get("title", None))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        """Handle footnote_ref token; mistune keeps the label in 'raw'."""
        attrs = token.get("attrs", {})
        identifier = token.get("raw") or (attrs.get("label", "") if isinstance(attrs, dict) else "")
        return FootnoteReference(identifier=identifier)

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unknown token types

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Skipping unknown inline token type: {token_type!r}")
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2vim.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
