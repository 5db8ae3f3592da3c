#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for md2vim (encoding detection and output writing)."""

from md2vim.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection
from md2vim.utils.io_utils import write_content

__all__ = ["normalize_stream_to_text", "read_text_with_encoding_detection", "write_content"]
