#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2vim/options/vimdoc.py
"""Configuration options for vimdoc rendering.

This module defines options for rendering AST to Vim help file format.
"""

from dataclasses import dataclass, field

from md2vim.constants import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_DESCRIPTION,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_NO_RULES,
    DEFAULT_NO_TOC,
    DEFAULT_PASCAL_TAGS,
)
from md2vim.options.base import BaseRendererOptions


@dataclass(frozen=True)
class VimDocOptions(BaseRendererOptions):
    """Configuration options for vimdoc rendering.

    Parameters
    ----------
    column_width : int, default 80
        Width of rule lines; right-aligned tags end at this column.
    description : str, default ""
        Free text shown right-aligned on the first line, next to the
        file name. Empty means the first line is the bare file name.
    no_rules : bool, default False
        Suppress the ``=``/``-`` rule lines above level 1 and 2 headings.
        Thematic breaks are always drawn.
    no_toc : bool, default False
        Suppress the generated "Contents" section.
    pascal_tags : bool, default False
        Build help tags as ``Title-HeadingInPascalCase`` instead of the
        default ``title-heading_in_snake_case``.
    indent_width : int, default 4
        Spaces used to indent list item bodies, fenced block contents and
        nested Contents entries.

    Examples
    --------
        >>> from md2vim.options import VimDocOptions
        >>> options = VimDocOptions(column_width=78, no_toc=True)
        >>> options.create_updated(pascal_tags=True).pascal_tags
        True

    """

    column_width: int = field(
        default=DEFAULT_COLUMN_WIDTH,
        metadata={"help": "Column width of the generated help file", "cli_name": "cols", "type": int,
                  "importance": "core"},
    )
    description: str = field(
        default=DEFAULT_DESCRIPTION,
        metadata={"help": "Short description shown on the first line", "cli_name": "desc", "type": str,
                  "importance": "core"},
    )
    no_rules: bool = field(
        default=DEFAULT_NO_RULES,
        metadata={"help": "Do not draw rules above level 1 and 2 headings", "cli_name": "norules",
                  "importance": "core"},
    )
    no_toc: bool = field(
        default=DEFAULT_NO_TOC,
        metadata={"help": "Do not generate a table of contents", "cli_name": "notoc", "importance": "core"},
    )
    pascal_tags: bool = field(
        default=DEFAULT_PASCAL_TAGS,
        metadata={"help": "Use PascalCase help tags instead of snake_case", "cli_name": "pascal",
                  "importance": "core"},
    )
    indent_width: int = field(
        default=DEFAULT_INDENT_WIDTH,
        metadata={"help": "Indentation width in spaces", "cli_name": "tabs", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If the column width is not positive or the indent width is negative.

        """
        super().__post_init__()
        if self.column_width <= 0:
            raise ValueError(f"column_width must be positive, got {self.column_width}")
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")
