"""md2vim - convert Markdown documents into Vim help files.

md2vim parses Markdown with mistune into a small document AST and renders
that AST as vimdoc: the plain text format read by Vim's ``:help``, with
``*tags*``, ``|references|``, rule lines, fenced literal blocks and a
generated table of contents.

Examples
--------
Convert a string:

    >>> from md2vim import to_vimdoc
    >>> help_text = to_vimdoc("# Usage\\n\\nRun it.", "myplugin.txt")

Convert a file, collecting what could not be represented:

    >>> from md2vim import VimDocOptions, convert_file
    >>> skipped = convert_file("README.md", "doc/myplugin.txt", VimDocOptions(column_width=78))

Work with the AST directly:

    >>> from md2vim import to_ast, VimDocRenderer
    >>> doc = to_ast("README.md")
    >>> renderer = VimDocRenderer("myplugin.txt")
    >>> help_text = renderer.render_to_string(doc)
    >>> renderer.diagnostics
    []

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from md2vim.api import convert_file, render_vimdoc, to_ast, to_vimdoc
from md2vim.exceptions import (
    ConfigError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    HeadingRegistryError,
    InvalidOptionsError,
    ListStateError,
    Md2VimError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2vim.options import MarkdownParserOptions, VimDocOptions
from md2vim.renderers import RenderDiagnostic, VimDocRenderer

__all__ = [
    "__version__",
    "to_vimdoc",
    "to_ast",
    "render_vimdoc",
    "convert_file",
    "VimDocOptions",
    "MarkdownParserOptions",
    "VimDocRenderer",
    "RenderDiagnostic",
    "Md2VimError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "ParsingError",
    "RenderingError",
    "ListStateError",
    "HeadingRegistryError",
    "OutputWriteError",
]
