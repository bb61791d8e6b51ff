"""Base classes for parser and renderer options.

This module defines the foundation classes for the options used by the
markdown parser and the DOCX renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2docx.constants import DEFAULT_CREATOR


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


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    creator : str or None, default "md2docx"
        Creator application name written to document metadata. Set to None
        to leave the metadata untouched.

    """

    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={
            "help": "Creator application name for document metadata. Set to None to disable creator metadata.",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options."""

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass
