#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2vim/options/markdown.py
"""Configuration options for Markdown parsing."""

from dataclasses import dataclass, field

from md2vim.constants import (
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from md2vim.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    The GFM extensions are enabled by default even though vimdoc output
    drops them: recognizing a table or a footnote lets the renderer report
    it, where leaving the extension off would leak the raw pipes and
    brackets into the help file as paragraph text.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM pipe tables
    parse_strikethrough : bool, default True
        Recognize ``~~strikethrough~~``
    parse_footnotes : bool, default True
        Recognize ``[^label]`` footnotes
    parse_frontmatter : bool, default True
        Strip YAML front matter (``---`` delimited) into document metadata

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Recognize GFM tables", "cli_name": "no-parse-tables", "importance": "advanced"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Recognize strikethrough", "cli_name": "no-parse-strikethrough", "importance": "advanced"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Recognize footnotes", "cli_name": "no-parse-footnotes", "importance": "advanced"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Parse YAML front matter", "cli_name": "no-parse-frontmatter", "importance": "advanced"},
    )
