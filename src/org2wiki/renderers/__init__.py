#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/renderers/__init__.py
"""Renderers turning document trees into output markup."""

from org2wiki.renderers.base import BaseRenderer
from org2wiki.renderers.context import RenderContext
from org2wiki.renderers.mediawiki import MediaWikiRenderer

__all__ = ["BaseRenderer", "MediaWikiRenderer", "RenderContext"]
