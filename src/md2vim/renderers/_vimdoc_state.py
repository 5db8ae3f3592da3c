#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vim/renderers/_vimdoc_state.py
"""Per-conversion state of the vimdoc renderer.

This module holds the two pieces of renderer state that outlive a single
node visit:

- :class:`ListStack`, the nested list counters
- :class:`HeadingRegistry`, every heading seen so far, used at the end of
  the traversal to number chapters and build the table of contents

plus the help-tag naming helpers shared by headings and the contents.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from md2vim.exceptions import HeadingRegistryError, ListStateError


class ListStyle(Enum):
    """Marker style of a list."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass
class ListFrame:
    """Counter state for one open list."""

    style: ListStyle
    index: int = 1


class ListStack:
    """Stack of open lists; only the innermost frame is ever mutated."""

    def __init__(self) -> None:
        self._frames: list[ListFrame] = []

    def push(self, style: ListStyle) -> ListFrame:
        frame = ListFrame(style)
        self._frames.append(frame)
        return frame

    def pop(self) -> ListFrame:
        if not self._frames:
            raise ListStateError()
        return self._frames.pop()

    def top(self) -> ListFrame:
        if not self._frames:
            raise ListStateError()
        return self._frames[-1]

    def __len__(self) -> int:
        return len(self._frames)


@dataclass(frozen=True)
class HeadingEntry:
    """A registered heading.

    Parameters
    ----------
    text : str
        Rendered inline text of the heading, with formatting already applied
    level : int
        Heading level, 1 to 6
    position : int
        Index of the entry in its registry

    """

    text: str
    level: int
    position: int


class HeadingRegistry:
    """Ordered, append-only record of the headings of one document."""

    def __init__(self) -> None:
        self._entries: list[HeadingEntry] = []

    def add(self, text: str, level: int) -> HeadingEntry:
        """Register a heading and return its entry."""
        entry = HeadingEntry(text=text, level=level, position=len(self._entries))
        self._entries.append(entry)
        return entry

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, position: int) -> HeadingEntry:
        if not 0 <= position < len(self._entries):
            raise HeadingRegistryError(position)
        return self._entries[position]

    def chapter_number(self, entry: HeadingEntry) -> str:
        """Return the dotted chapter number of ``entry``, e.g. ``"1.2."``.

        Walks backwards from the entry. Siblings at the current level bump
        the counter; a shallower heading closes the current level and starts
        counting at its own level; deeper headings are skipped.

        Raises
        ------
        HeadingRegistryError
            If ``entry`` is not the entry registered at its position

        """
        if self[entry.position] is not entry:
            raise HeadingRegistryError(entry.position)

        level = entry.level
        count = 1
        counters: list[int] = []
        for previous in reversed(self._entries[: entry.position]):
            if previous.level == level:
                count += 1
            elif previous.level < level:
                counters.append(count)
                level = previous.level
                count = 1
        counters.append(count)

        return ".".join(str(counter) for counter in reversed(counters)) + "."


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def derive_title(filename: str, pascal_tags: bool = False) -> str:
    """Derive the tag prefix from an output file name.

    The directory and the last extension are dropped: ``doc/rigellians.txt``
    gives ``rigellians`` (or ``Rigellians`` in PascalCase mode).
    """
    stem = PurePath(filename).stem
    if pascal_tags:
        return _capitalize(stem)
    return stem.lower()


def make_help_tag(title: str, text: str, pascal_tags: bool = False) -> str:
    """Build the help tag for heading ``text`` in a document titled ``title``.

    Duplicate heading texts produce identical tags; Vim jumps to the first.

    Examples
    --------
        >>> make_help_tag("rigellians", "How To Cook For Forty Humans")
        'rigellians-how_to_cook_for_forty_humans'
        >>> make_help_tag("Rigellians", "How To Cook For Forty Humans", pascal_tags=True)
        'Rigellians-HowToCookForFortyHumans'

    """
    if pascal_tags:
        slug = "".join(_capitalize(word) for word in text.split(" "))
    else:
        slug = text.lower().replace(" ", "_")
    return f"{title}-{slug}"
