#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/parsers/__init__.py
"""Parsers that build the md2vim AST from source documents."""

from md2vim.parsers.base import BaseParser
from md2vim.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
