#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for the frozen option dataclasses
used by org2wiki renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from org2wiki.constants import DEFAULT_FILE_EXTENSION, DEFAULT_LANGUAGE


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
    language : str, default "en"
        Language used to localize fixed strings (section titles, "See section")
    file_extension : str, default ".wiki"
        Extension that links to other source documents are rewritten to

    """

    language: str = field(
        default=DEFAULT_LANGUAGE,
        metadata={"help": "Language of generated fixed strings (e.g. 'en', 'fr')", "importance": "core"},
    )
    file_extension: str = field(
        default=DEFAULT_FILE_EXTENSION,
        metadata={"help": "Extension for links to other exported documents", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If the file extension does not start with a dot.

        """
        if self.file_extension and not self.file_extension.startswith("."):
            raise ValueError(f"file_extension must start with '.', got {self.file_extension!r}")
