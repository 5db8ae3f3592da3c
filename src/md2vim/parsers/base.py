#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns source text into the md2vim AST (Abstract Syntax Tree).

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2vim.ast import Document
from md2vim.exceptions import FileAccessError, FileNotFoundError, InvalidOptionsError
from md2vim.options.base import BaseParserOptions
from md2vim.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: source text, or a path to an existing file
    - Path: file path to read
    - IO[bytes] or IO[str]: file-like object
    - bytes: raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Input document

        Returns
        -------
        Document
            AST Document node

        Raises
        ------
        ParsingError
            If parsing fails

        """
        pass

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            with open(path, "rb") as f:
                return read_text_with_encoding_detection(f.read())
        except OSError as e:
            if not path.exists():
                raise FileNotFoundError(str(path), original_error=e) from e
            raise FileAccessError(str(path), message=f"Cannot read input file: {path}", original_error=e) from e

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], bytes]) -> str:
        """Load content from various input types with encoding detection.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Input data to load

        Returns
        -------
        str
            Document content as string

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            return BaseParser._read_file(input_data)
        elif isinstance(input_data, str):
            # Could be file path or content
            # Linux has a 255 char limit for path components, and calling
            # path.exists() on very long strings raises OSError
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.exists() and path.is_file():
                        logger.debug(f"Reading input from file: {path}")
                        return BaseParser._read_file(path)
                except OSError:
                    # Path too long or invalid - treat as content
                    pass
            return input_data
        else:
            # File-like object (handles both binary and text mode)
            if input_data.seekable():
                input_data.seek(0)
            return normalize_stream_to_text(input_data)
