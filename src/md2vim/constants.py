#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2vim.

This module centralizes the hardcoded values used across the library:
layout defaults for vimdoc output, the characters that make up rules,
fences and tag markers, and the file/environment names used by the CLI.

Constants are organized by category:
1. Type Definitions
2. Vimdoc Layout Defaults
3. Vimdoc Markup Characters
4. Markdown Parsing
5. CLI and Configuration
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Vimdoc Layout Defaults
# =============================================================================

DEFAULT_COLUMN_WIDTH = 80
DEFAULT_INDENT_WIDTH = 4
DEFAULT_DESCRIPTION = ""
DEFAULT_NO_RULES = False
DEFAULT_NO_TOC = False
DEFAULT_PASCAL_TAGS = False

# Columns reserved at the end of a heading line for the " ~" marker
HEADING_MARKER = " ~"
HEADING_TRIM = -len(HEADING_MARKER)

# =============================================================================
# Vimdoc Markup Characters
# =============================================================================

PRIMARY_RULE_CHAR = "="
SECONDARY_RULE_CHAR = "-"
FENCE_OPEN = ">"
FENCE_CLOSE = "<"
FENCE_CHARS = (FENCE_OPEN, FENCE_CLOSE)
TAG_DELIMITER = "*"
REFERENCE_DELIMITER = "|"
TOC_FILL_CHAR = "."
HEADING_FILL_CHAR = " "
INLINE_CODE_DELIMITER = "`"
UNORDERED_LIST_MARKER = "* "
CONTENTS_HEADING = "Contents"

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_FRONTMATTER = True

MARKDOWN_EXTENSIONS = [".md", ".markdown", ".mdown", ".mkd", ".mkdn"]

# Pandoc-style title block marker ("% Title" on the first line)
TITLE_BLOCK_PREFIX = "%"

# =============================================================================
# CLI and Configuration
# =============================================================================

ENV_PREFIX = "MD2VIM_"
CONFIG_TOOL_SECTION = "md2vim"
CONFIG_FILENAMES = [".md2vim.toml", ".md2vim.yaml", ".md2vim.yml", ".md2vim.json"]
DEFAULT_OUTPUT_EXTENSION = ".txt"
STDOUT_MARKER = "-"
DEFAULT_LOG_LEVEL: LogLevelName = "WARNING"
