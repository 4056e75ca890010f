#  Copyright (c) 2025 Tom Villani, Ph.D.
# org2wiki/options/mediawiki.py
"""Configuration options for MediaWiki rendering.

This module defines options for rendering outline document trees to
MediaWiki markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from org2wiki.constants import (
    DEFAULT_FOOTNOTE_REFERENCE_FORMAT,
    DEFAULT_FOOTNOTE_SEPARATOR,
    DEFAULT_FOOTNOTES_SECTION_TEMPLATE,
    DEFAULT_HEADLINE_STYLE,
    DEFAULT_INLINE_IMAGE_RULES,
    DEFAULT_PRESERVE_BREAKS,
    DEFAULT_TABLE_CLASS,
    DEFAULT_WITH_PRIORITY,
    DEFAULT_WITH_SMART_QUOTES,
    DEFAULT_WITH_SPECIAL_STRINGS,
    DEFAULT_WITH_TAGS,
    DEFAULT_WITH_TODO_KEYWORDS,
    HEADLINE_STYLES,
)
from org2wiki.options.base import BaseRendererOptions


def _count_placeholders(template: str) -> int:
    return template.replace("%%", "").count("%s")


@dataclass(frozen=True)
class MediaWikiOptions(BaseRendererOptions):
    r"""Configuration options for MediaWiki rendering.

    Parameters
    ----------
    with_todo_keywords : bool, default True
        Include TODO keywords in headlines.
    with_tags : bool, default True
        Append headline tags as ``:tag1:tag2:``.
    with_priority : bool, default False
        Include priority cookies (``[#A]``) in headlines.
    with_smart_quotes : bool, default False
        Replace straight quotes with typographic ones.
    with_special_strings : bool, default True
        Convert ``--``, ``---``, ``...`` and ``\-`` to typographic entities.
    preserve_breaks : bool, default False
        Keep source line breaks as hard breaks.
    headline_style : {"atx", "setext"}, default "atx"
        ``atx`` wraps titles in ``=`` runs; ``setext`` underlines them.
        Unsupported values fall back to ``atx`` at render time.
    default_table_class : str or None, default "wikitable"
        CSS class applied to every table; None for no class attribute.
    footnote_reference_format : str, default "<sup>%s</sup>"
        Template for footnote markers; one ``%s`` receives the number.
    footnote_separator : str, default "<sup>, </sup>"
        Inserted between directly adjacent footnote markers.
    footnotes_section_template : str, default "== %s ==\n%s"
        Template for the footnotes section; receives the localized title
        and the joined definitions.
    inline_image_rules : tuple of (str, str), default file/http/https images
        Link type and path regex pairs identifying inline images.

    Examples
    --------
        >>> from org2wiki.renderers.mediawiki import MediaWikiRenderer
        >>> options = MediaWikiOptions(headline_style="setext", default_table_class=None)
        >>> renderer = MediaWikiRenderer(options)

    """

    with_todo_keywords: bool = field(
        default=DEFAULT_WITH_TODO_KEYWORDS,
        metadata={"help": "Include TODO keywords in headlines", "cli_name": "no-todo-keywords", "importance": "core"},
    )
    with_tags: bool = field(
        default=DEFAULT_WITH_TAGS,
        metadata={"help": "Include headline tags", "cli_name": "no-tags", "importance": "core"},
    )
    with_priority: bool = field(
        default=DEFAULT_WITH_PRIORITY,
        metadata={"help": "Include headline priority cookies", "cli_name": "with-priority", "importance": "core"},
    )
    with_smart_quotes: bool = field(
        default=DEFAULT_WITH_SMART_QUOTES,
        metadata={"help": "Use typographic quotes", "cli_name": "smart-quotes", "importance": "core"},
    )
    with_special_strings: bool = field(
        default=DEFAULT_WITH_SPECIAL_STRINGS,
        metadata={
            "help": "Convert --, ---, ... and \\- to typographic entities",
            "cli_name": "no-special-strings",
            "importance": "core",
        },
    )
    preserve_breaks: bool = field(
        default=DEFAULT_PRESERVE_BREAKS,
        metadata={"help": "Keep source line breaks as hard breaks", "cli_name": "preserve-breaks", "importance": "core"},
    )
    headline_style: str = field(
        default=DEFAULT_HEADLINE_STYLE,
        metadata={"help": "Headline layout", "choices": list(HEADLINE_STYLES), "importance": "core"},
    )
    default_table_class: str | None = field(
        default=DEFAULT_TABLE_CLASS,
        metadata={"help": "CSS class applied to tables", "cli_name": "table-class", "importance": "core"},
    )
    footnote_reference_format: str = field(
        default=DEFAULT_FOOTNOTE_REFERENCE_FORMAT,
        metadata={"help": "Footnote marker template with one %s placeholder", "importance": "advanced"},
    )
    footnote_separator: str = field(
        default=DEFAULT_FOOTNOTE_SEPARATOR,
        metadata={"help": "Markup between adjacent footnote markers", "importance": "advanced"},
    )
    footnotes_section_template: str = field(
        default=DEFAULT_FOOTNOTES_SECTION_TEMPLATE,
        metadata={"help": "Footnotes section template with two %s placeholders", "importance": "advanced"},
    )
    inline_image_rules: tuple[tuple[str, str], ...] = field(
        default=DEFAULT_INLINE_IMAGE_RULES,
        metadata={"help": "Link type and path regex pairs identifying inline images", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate template placeholders.

        Raises
        ------
        ValueError
            If a template does not have the expected number of ``%s`` placeholders.

        """
        super().__post_init__()
        if _count_placeholders(self.footnote_reference_format) != 1:
            raise ValueError(
                f"footnote_reference_format needs exactly one %s placeholder, got {self.footnote_reference_format!r}"
            )
        if _count_placeholders(self.footnotes_section_template) != 2:
            raise ValueError(
                "footnotes_section_template needs exactly two %s placeholders, "
                f"got {self.footnotes_section_template!r}"
            )
        # Config files deliver lists of lists
        object.__setattr__(
            self, "inline_image_rules", tuple((str(kind), str(pattern)) for kind, pattern in self.inline_image_rules)
        )
