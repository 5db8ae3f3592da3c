#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2vim.

Options are frozen dataclasses: build a modified copy with
``create_updated()`` rather than mutating an instance.
"""

from __future__ import annotations

from md2vim.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2vim.options.markdown import MarkdownParserOptions
from md2vim.options.vimdoc import VimDocOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseRendererOptions",
    "BaseParserOptions",
    "MarkdownParserOptions",
    "VimDocOptions",
]
