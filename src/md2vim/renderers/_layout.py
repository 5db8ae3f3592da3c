#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/renderers/_layout.py
"""Output buffer and line layout primitives for the vimdoc renderer.

The renderer writes speculatively: it records a mark, renders children, and
then either keeps what was written, rewrites it, or rolls it back. Marks are
plain integers, so they nest to any depth as long as inner marks are
resolved before outer ones.

Widths are measured in characters of the output text.
"""

from __future__ import annotations

import re

from md2vim.constants import FENCE_CHARS


class OutputBuffer:
    """Append-only text buffer with mark/truncate rollback.

    Examples
    --------
        >>> buffer = OutputBuffer()
        >>> mark = buffer.mark()
        >>> buffer.write("draft")
        >>> buffer.truncate(mark)
        >>> buffer.getvalue()
        ''

    """

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        """Append ``text``; empty strings are ignored."""
        if text:
            self._chunks.append(text)

    def mark(self) -> int:
        """Return a mark for the current end of the buffer."""
        return len(self._chunks)

    def has_output_since(self, mark: int) -> bool:
        """Return True if anything was written after ``mark``."""
        return len(self._chunks) > mark

    def text_since(self, mark: int) -> str:
        """Return everything written after ``mark``."""
        return "".join(self._chunks[mark:])

    def truncate(self, mark: int) -> None:
        """Discard everything written after ``mark``."""
        del self._chunks[mark:]

    def take(self, mark: int) -> str:
        """Return everything written after ``mark`` and discard it."""
        text = self.text_since(mark)
        self.truncate(mark)
        return text

    def getvalue(self) -> str:
        """Return the whole buffer as a string."""
        return "".join(self._chunks)

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)


def rule(char: str, width: int) -> str:
    """Return a full-width rule line of ``char``, newline terminated."""
    return char * width + "\n"


def split_line(left: str, right: str, fill: str, width: int, trim: int = 0) -> str:
    """Join ``left`` and ``right`` with ``fill`` so the line spans ``width``.

    Parameters
    ----------
    left, right : str
        Text placed at the start and at the end of the line
    fill : str
        Single padding character
    width : int
        Target column width
    trim : int, default 0
        Added to the computed padding; callers reserve room for a trailing
        marker with a negative trim

    Returns
    -------
    str
        The joined line, without a trailing newline. At least one fill
        character separates the two parts, even when they overflow ``width``.

    """
    padding = width - (len(left) + len(right)) + trim
    if padding <= 0:
        padding = 1
    return left + fill * padding + right


def indent_block(text: str, indent_width: int, trim: int = 0) -> str:
    """Indent every non-empty line of ``text`` and drop empty lines.

    The first line's indent is reduced by ``trim`` so that text following a
    list marker lines up with the continuation lines below it.

    Examples
    --------
        >>> indent_block("one\\n\\ntwo\\n", 4, trim=2)
        '  one\\n    two\\n'

    """
    lines = [line for line in text.split("\n") if line]
    out = []
    for i, line in enumerate(lines):
        width = max(indent_width - trim, 0) if i == 0 else indent_width
        out.append(" " * width + line + "\n")
    return "".join(out)


_FENCE_LINE_RE = re.compile(
    r"^[ \t]+([" + "".join(re.escape(c) for c in FENCE_CHARS) + r"])[ \t]*$",
    re.MULTILINE,
)


def strip_fence_indentation(text: str) -> str:
    """Move indented fence lines (a lone ``>`` or ``<``) back to column 0.

    Vim ends a literal block only at a ``<`` in the first column, and list
    item indentation pushes fences nested in list items away from it.
    """
    return _FENCE_LINE_RE.sub(r"\1", text)
