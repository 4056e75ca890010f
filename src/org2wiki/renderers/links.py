#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/renderers/links.py
"""Path helpers for the link resolver."""

from __future__ import annotations

import os
import re
from typing import Optional, Union

from org2wiki.constants import SOURCE_FILE_PATTERN

_SOURCE_FILE_RE = re.compile(SOURCE_FILE_PATTERN, re.IGNORECASE)


def rewrite_source_extension(path: str, extension: str) -> str:
    """Point a link to another source document at its exported counterpart.

    Examples
    --------
        >>> rewrite_source_extension("notes/Plan.ORG", ".wiki")
        'notes/Plan.wiki'
        >>> rewrite_source_extension("image.png", ".wiki")
        'image.png'

    """
    return _SOURCE_FILE_RE.sub(extension, path, count=1)


def file_uri(path: str) -> str:
    """Return ``file://`` plus the normalized path for absolute paths, else ``path``."""
    if os.path.isabs(path):
        return "file://" + os.path.normpath(path)
    return path


def normalize_image_path(path: str) -> str:
    """Normalize absolute image paths; relative ones stay as written."""
    if os.path.isabs(path):
        return os.path.normpath(path)
    return path


def format_ordinal(ordinal: Union[int, list[int], None]) -> Optional[str]:
    """Format an element number, joining section numbers with dots.

    Examples
    --------
        >>> format_ordinal([2, 1])
        '2.1'
        >>> format_ordinal(3)
        '3'

    """
    if ordinal is None:
        return None
    if isinstance(ordinal, int):
        return str(ordinal)
    if not ordinal:
        return None
    return ".".join(str(part) for part in ordinal)
