#  Copyright (c) 2025 Tom Villani, Ph.D.
# md2vim/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
by the Markdown parser and the vimdoc renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all option fields, in declaration order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build options from a mapping, ignoring keys that are not fields.

        Keys may use dashes in place of underscores (``column-width``), as
        written in TOML and YAML configuration files.
        """
        known = set(cls.field_names())
        kwargs = {}
        for key, value in values.items():
            name = str(key).replace("-", "_")
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass
    fields, with ``help``/``cli_name``/``importance`` entries in each field's
    metadata for the command line builder.

    """

    def __post_init__(self) -> None:
        """Validate option values (no base renderer fields to check)."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options."""

    def __post_init__(self) -> None:
        """Validate option values (no base parser fields to check)."""
        pass
