#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the org2wiki library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Headline and Text Formatting
3. Tables and Lists
4. Footnotes
5. Links and Images
6. Configuration Files
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HeadlineStyle = Literal["atx", "setext"]

HEADLINE_STYLES: tuple[str, ...] = ("atx", "setext")

# =============================================================================
# Headline and Text Formatting
# =============================================================================

DEFAULT_WITH_TODO_KEYWORDS = True
DEFAULT_WITH_TAGS = True
DEFAULT_WITH_PRIORITY = False
DEFAULT_WITH_SMART_QUOTES = False
DEFAULT_WITH_SPECIAL_STRINGS = True
DEFAULT_PRESERVE_BREAKS = False
DEFAULT_HEADLINE_STYLE: HeadlineStyle = "atx"

# Separator between a headline title and its tag string
HEADLINE_TAGS_SEPARATOR = "     "

QUOTE_BLOCK_OPEN = "<blockquote>"
QUOTE_BLOCK_CLOSE = "</blockquote>"
EXAMPLE_BLOCK_INDENT = "    "
LINE_BREAK_MARKUP = "<br />"
HORIZONTAL_RULE_MARKUP = "----"

# =============================================================================
# Tables and Lists
# =============================================================================

DEFAULT_TABLE_CLASS: str | None = "wikitable"

# First-column markers that make an org table column "special"
TABLE_SPECIAL_COLUMN_MARKERS: frozenset[str] = frozenset({"", "#", "!", "$", "*", "_", "^", "/"})

UNORDERED_BULLET = "*"
ORDERED_BULLET = "#"

CHECKBOX_MARKERS: dict[str, str] = {
    "on": "☑ ",
    "trans": "<code>[-]</code> ",
    "off": "☐ ",
}

# =============================================================================
# Footnotes
# =============================================================================

DEFAULT_FOOTNOTE_REFERENCE_FORMAT = "<sup>%s</sup>"
DEFAULT_FOOTNOTE_SEPARATOR = "<sup>, </sup>"
DEFAULT_FOOTNOTES_SECTION_TEMPLATE = "== %s ==\n%s"
FOOTNOTE_DEFINITION_FORMAT = "[%d] %s\n"

# =============================================================================
# Links and Images
# =============================================================================

DEFAULT_LANGUAGE = "en"
DEFAULT_FILE_EXTENSION = ".wiki"

# Link types whose path is composed as "<type>:<path>"
URL_LINK_TYPES: frozenset[str] = frozenset({"http", "https", "ftp", "mailto", "news"})

IMAGE_FILE_PATTERN = r"\.(jpeg|jpg|png|gif|svg|webp)\Z"

# Link type -> regex over the raw path. A link without description whose
# path matches the rule of its type is rendered as an inline image.
DEFAULT_INLINE_IMAGE_RULES: tuple[tuple[str, str], ...] = (
    ("file", IMAGE_FILE_PATTERN),
    ("http", IMAGE_FILE_PATTERN),
    ("https", IMAGE_FILE_PATTERN),
)

# Source documents whose links get rewritten to the output extension
SOURCE_FILE_PATTERN = r"\.org\Z"

CODE_REFERENCE_PATTERN = r"\(ref:(?P<label>[-\w]+)\)"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (".org2wiki.toml", ".org2wiki.yaml", ".org2wiki.yml", ".org2wiki.json")
PYPROJECT_TOOL_SECTION = "org2wiki"
