#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2vim/renderers/__init__.py
"""AST renderers.

This package provides the vimdoc renderer, which turns the AST into a Vim
help file.

Examples
--------
Render an AST to vimdoc:

    >>> from md2vim.ast import Document, Heading, Text
    >>> from md2vim.renderers import VimDocRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> renderer = VimDocRenderer("plugin.txt")
    >>> help_text = renderer.render_to_string(doc)

"""

from md2vim.renderers.base import BaseRenderer
from md2vim.renderers.vimdoc import RenderDiagnostic, VimDocRenderer

__all__ = ["BaseRenderer", "RenderDiagnostic", "VimDocRenderer"]
