#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/renderers/vimdoc.py
"""Vim help file rendering from AST.

This module provides the VimDocRenderer class which converts AST nodes to
the plain text format read by Vim's ``:help`` viewer:

- a first line with the file name and an optional description
- an optional "Contents" section with chapter numbers and ``|tag|`` links
- headings as upper-cased titles with a right-aligned ``*tag*``, under
  ``=`` (level 1) or ``-`` (level 2) rules
- literal blocks between bare ``>`` and ``<`` fence lines
- ``* `` and ``N. `` list markers with hanging indentation

Rendering happens in two passes. The traversal writes into a single
:class:`~md2vim.renderers._layout.OutputBuffer` and records every heading;
the finalization pass then splices the table of contents in after the
first line and moves indented fences back to column 0.

Tables, footnotes, title blocks and strikethrough have no vimdoc form. They
produce no output and are recorded in :attr:`VimDocRenderer.diagnostics`.
Images are dropped silently.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import IO, Union

from md2vim.ast.nodes import (
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
from md2vim.constants import (
    CONTENTS_HEADING,
    FENCE_CLOSE,
    FENCE_OPEN,
    HEADING_FILL_CHAR,
    HEADING_MARKER,
    HEADING_TRIM,
    INLINE_CODE_DELIMITER,
    PRIMARY_RULE_CHAR,
    REFERENCE_DELIMITER,
    SECONDARY_RULE_CHAR,
    TAG_DELIMITER,
    TOC_FILL_CHAR,
    UNORDERED_LIST_MARKER,
)
from md2vim.exceptions import RenderingError
from md2vim.options.vimdoc import VimDocOptions
from md2vim.renderers._layout import OutputBuffer, indent_block, rule, split_line, strip_fence_indentation
from md2vim.renderers._vimdoc_state import (
    HeadingEntry,
    HeadingRegistry,
    ListStack,
    ListStyle,
    derive_title,
    make_help_tag,
)
from md2vim.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderDiagnostic:
    """A non-fatal problem found while rendering.

    Parameters
    ----------
    node_type : str
        Class name of the node that could not be rendered
    message : str
        Human-readable description

    """

    node_type: str
    message: str


class VimDocRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to a Vim help file.

    A renderer instance holds the state of exactly one conversion (output
    buffer, open lists, registered headings) and cannot be reused: create a
    new one for every document.

    Parameters
    ----------
    filename : str
        Name of the help file being written, e.g. ``"md2vim.txt"``. It is
        shown on the first line and its stem is the prefix of every tag.
    options : VimDocOptions or None, default = None
        Vimdoc rendering options

    Examples
    --------
        >>> from md2vim.ast import Document, Heading, Paragraph, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Usage")]),
        ...     Paragraph(content=[Text(content="Run it.")]),
        ... ])
        >>> renderer = VimDocRenderer("tool.txt", VimDocOptions(no_toc=True))
        >>> print(renderer.render_to_string(doc))  # doctest: +SKIP
        tool.txt
        <BLANKLINE>
        ================================================================================
        USAGE                                                           *tool-usage* ~
        <BLANKLINE>
        Run it.

    """

    def __init__(self, filename: str, options: VimDocOptions | None = None):
        """Initialize the renderer for one output file."""
        BaseRenderer._validate_options_type(options, VimDocOptions, "vimdoc")
        options = options or VimDocOptions()
        BaseRenderer.__init__(self, options)
        self.options: VimDocOptions = options
        self.filename = PurePath(filename).name
        self.title = derive_title(self.filename, options.pascal_tags)
        self.diagnostics: list[RenderDiagnostic] = []

        self._buffer = OutputBuffer()
        self._lists = ListStack()
        self._headings = HeadingRegistry()
        self._toc_offset: int | None = None
        self._used = False

    @property
    def headings(self) -> list[HeadingEntry]:
        """Headings registered so far, in document order."""
        return list(self._headings)

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to vimdoc text.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Vim help file content

        Raises
        ------
        RenderingError
            If the renderer was already used, or if the traversal left the
            renderer in an inconsistent state (see ListStateError and
            HeadingRegistryError)

        """
        if self._used:
            raise RenderingError(
                "VimDocRenderer renders a single document; create a new renderer for each conversion",
                rendering_stage="setup",
            )
        self._used = True

        document.accept(self)
        return self._finalize()

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to vimdoc and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        """
        text = self.render_to_string(doc)
        self.write_text_output(text, output)

    # ------------------------------------------------------------------
    # Layout helpers
    # ------------------------------------------------------------------

    def _tag_for(self, text: str) -> str:
        return make_help_tag(self.title, text, self.options.pascal_tags)

    def _heading_rule(self, level: int) -> str:
        """Return the rule drawn above a heading of ``level`` ("" for none)."""
        if self.options.no_rules:
            return ""
        if level == 1:
            return rule(PRIMARY_RULE_CHAR, self.options.column_width)
        if level == 2:
            return rule(SECONDARY_RULE_CHAR, self.options.column_width)
        return ""

    def _heading_line(self, text: str) -> str:
        """Return the title line of a heading, followed by a blank line."""
        tag = f"{TAG_DELIMITER}{self._tag_for(text)}{TAG_DELIMITER}"
        line = split_line(text.upper(), tag, HEADING_FILL_CHAR, self.options.column_width, HEADING_TRIM)
        return line + HEADING_MARKER + "\n\n"

    def _write_fenced(self, content: str) -> None:
        self._buffer.write(FENCE_OPEN + "\n")
        self._buffer.write(indent_block(content, self.options.indent_width))
        self._buffer.write(FENCE_CLOSE + "\n\n")

    def _render_captured(self, children: list[Node]) -> str:
        """Render ``children`` and return their text without keeping it."""
        mark = self._buffer.mark()
        self.visit_children(children)
        return self._buffer.take(mark)

    def _skip_unsupported(self, node: Node) -> None:
        node_type = type(node).__name__
        diagnostic = RenderDiagnostic(
            node_type=node_type,
            message=f"{node_type} is not supported in vimdoc output and was skipped",
        )
        self.diagnostics.append(diagnostic)
        logger.warning(diagnostic.message)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def _render_contents(self) -> str:
        """Build the "Contents" section from the frozen heading registry."""
        contents = OutputBuffer()
        contents.write(self._heading_rule(1))
        contents.write(self._heading_line(CONTENTS_HEADING))

        for entry in self._headings:
            indent = " " * ((entry.level - 1) * self.options.indent_width)
            left = f"{indent}{self._headings.chapter_number(entry)} {entry.text}"
            reference = f"{REFERENCE_DELIMITER}{self._tag_for(entry.text)}{REFERENCE_DELIMITER}"
            contents.write(split_line(left, reference, TOC_FILL_CHAR, self.options.column_width, HEADING_TRIM))
            contents.write("\n")

        contents.write("\n")
        return contents.getvalue()

    def _finalize(self) -> str:
        body = self._buffer.getvalue()

        if not self.options.no_toc and self._toc_offset is not None:
            offset = self._toc_offset
            body = body[:offset] + self._render_contents() + body[offset:]
            logger.debug(f"Inserted contents for {len(self._headings)} headings at offset {offset}")

        return strip_fence_indentation(body)

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Writes the file name line, records where the contents section goes,
        then renders the children.

        Parameters
        ----------
        node : Document
            Document to render

        """
        if self.options.description:
            first_line = split_line(
                self.filename, self.options.description, HEADING_FILL_CHAR, self.options.column_width
            )
        else:
            first_line = self.filename
        self._buffer.write(first_line + "\n\n")

        if self._toc_offset is None:
            self._toc_offset = len(self._buffer)

        self.visit_children(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node and register it for the contents.

        A heading whose content renders to nothing is dropped entirely,
        together with its rule.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        start = self._buffer.mark()
        self._buffer.write(self._heading_rule(node.level))

        content_mark = self._buffer.mark()
        self.visit_children(node.content)
        if not self._buffer.has_output_since(content_mark):
            self._buffer.truncate(start)
            return

        text = self._buffer.take(content_mark)
        self._headings.add(text, node.level)
        self._buffer.write(self._heading_line(text))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node; empty paragraphs leave no trace."""
        mark = self._buffer.mark()
        self.visit_children(node.content)
        if not self._buffer.has_output_since(mark):
            self._buffer.truncate(mark)
            return
        self._buffer.write("\n\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a fenced literal block."""
        self._write_fenced(node.content)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node as a fenced literal block."""
        self._write_fenced(self._render_captured(node.children))

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node as a fenced literal block."""
        self._write_fenced(node.content)

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        self._lists.push(ListStyle.ORDERED if node.ordered else ListStyle.UNORDERED)
        last = len(node.items) - 1
        for i, item in enumerate(node.items):
            self._render_list_item(item, end_of_list=i == last)
        self._lists.pop()

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node in the innermost open list.

        Raises
        ------
        ListStateError
            If no list is open

        """
        self._render_list_item(node, end_of_list=False)

    def _render_list_item(self, node: ListItem, end_of_list: bool) -> None:
        frame = self._lists.top()

        start = self._buffer.mark()
        if frame.style is ListStyle.ORDERED:
            self._buffer.write(f"{frame.index}. ")
            frame.index += 1
        else:
            self._buffer.write(UNORDERED_LIST_MARKER)
        marker_width = len(self._buffer.text_since(start))

        content = self._render_captured(node.children)
        body = indent_block(content, self.options.indent_width, trim=marker_width)
        self._buffer.write(body or "\n")

        if end_of_list:
            self._buffer.write("\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as a ``-`` rule, even with rules suppressed."""
        self._buffer.write(rule(SECONDARY_RULE_CHAR, self.options.column_width))

    def visit_table(self, node: Table) -> None:
        """Skip a Table node."""
        self._skip_unsupported(node)

    def visit_table_row(self, node: TableRow) -> None:
        """Skip a TableRow node."""
        self._skip_unsupported(node)

    def visit_table_cell(self, node: TableCell) -> None:
        """Skip a TableCell node."""
        self._skip_unsupported(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Skip a FootnoteDefinition node."""
        self._skip_unsupported(node)

    def visit_title_block(self, node: TitleBlock) -> None:
        """Skip a TitleBlock node."""
        self._skip_unsupported(node)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._buffer.write(node.content)

    def visit_entity(self, node: Entity) -> None:
        """Render an Entity node as written."""
        self._buffer.write(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node (content only, vimdoc has no italics)."""
        self.visit_children(node.content)

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node (content only)."""
        self.visit_children(node.content)

    def visit_code(self, node: Code) -> None:
        """Render a Code node between backticks."""
        self._buffer.write(f"{INLINE_CODE_DELIMITER}{node.content}{INLINE_CODE_DELIMITER}")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node as written."""
        self._buffer.write(node.content)

    def visit_link(self, node: Link) -> None:
        """Render a Link node as ``text (url)``.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_captured(node.content)
        self._buffer.write(f"{content} ({node.url})")

    def visit_autolink(self, node: AutoLink) -> None:
        """Render an AutoLink node as its bare text."""
        self._buffer.write(node.text)

    def visit_image(self, node: Image) -> None:
        """Drop an Image node; the help viewer cannot show images."""
        pass

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node (hard or soft) as a newline."""
        self._buffer.write("\n")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Skip a Strikethrough node, including its text."""
        self._skip_unsupported(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Skip a FootnoteReference node."""
        self._skip_unsupported(node)
