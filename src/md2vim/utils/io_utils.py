#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/utils/io_utils.py
"""I/O utilities for handling output destinations.

Vim help files are plain UTF-8 text. This module writes rendered text to a
file path, or to a binary or text stream.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def _is_binary_stream(output: IO[bytes] | IO[str]) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or file-like object.

    Parameters
    ----------
    content : str
        Rendered text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8; binary streams
        receive UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
    >>> buffer = BytesIO()
    >>> write_content("help", buffer)
    >>> buffer.getvalue()
    b'help'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_content"]
