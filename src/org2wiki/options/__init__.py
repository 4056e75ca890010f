"""Renderer option dataclasses."""

from org2wiki.options.base import BaseRendererOptions, CloneFrozenMixin
from org2wiki.options.mediawiki import MediaWikiOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "MediaWikiOptions"]
