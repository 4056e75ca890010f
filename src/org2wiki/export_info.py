#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/export_info.py
"""Document queries the renderer delegates to the parser side.

The transcoder does not resolve links or inspect table structure on its own.
It asks an :class:`ExportInfo` object, normally supplied together with the
parsed tree. :class:`TreeExportInfo` answers every query from the tree
itself and is what the renderer uses when no other implementation is given.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from org2wiki.ast.index import NodeIndex
from org2wiki.ast.nodes import (
    Document,
    ExampleBlock,
    Headline,
    Link,
    Node,
    Paragraph,
    RadioTarget,
    Table,
    TableCell,
    TableRow,
    Target,
    get_node_children,
    iter_nodes,
    plain_text_of,
)
from org2wiki.constants import CODE_REFERENCE_PATTERN, TABLE_SPECIAL_COLUMN_MARKERS
from org2wiki.options.mediawiki import MediaWikiOptions
from org2wiki.utils.translations import translate

logger = logging.getLogger(__name__)

Ordinal = Union[int, list[int]]

_CODE_REFERENCE_RE = re.compile(CODE_REFERENCE_PATTERN)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ExternalPath:
    """Cross-reference target living in another file."""

    path: str


class ExportInfo(ABC):
    """Queries answered on behalf of the renderer.

    Every method is total: an unresolvable query returns None (or False)
    and the renderer degrades to a bare description or empty text.

    """

    @abstractmethod
    def resolve_cross_reference(self, link: Link) -> Union[ExternalPath, Node, None]:
        """Resolve a ``custom-id`` or ``id`` link."""

    @abstractmethod
    def resolve_radio_target(self, link: Link) -> Optional[Node]:
        """Return the radio target a ``radio`` link points to."""

    @abstractmethod
    def resolve_fuzzy_target(self, link: Link) -> Optional[Node]:
        """Return the element a ``fuzzy`` link names."""

    @abstractmethod
    def ordinal_of(self, node: Node) -> Optional[Ordinal]:
        """Return the number of ``node``: an int, a section number list, or None."""

    @abstractmethod
    def is_inline_image(self, link: Link, rules: tuple[tuple[str, str], ...]) -> bool:
        """Return whether ``link`` displays an image."""

    @abstractmethod
    def resolve_code_reference(self, link: Link) -> Optional[tuple[str, Union[int, str]]]:
        """Return ``(format_template, value)`` for a ``coderef`` link."""

    @abstractmethod
    def caption_of(self, node: Node) -> Optional[list[Node]]:
        """Return the caption of an element, if it has one."""

    @abstractmethod
    def localize(self, key: str) -> str:
        """Translate a fixed English string into the export language."""

    @abstractmethod
    def has_special_column(self, table: Table) -> bool:
        """Return whether the first column of ``table`` only holds row markers."""

    @abstractmethod
    def first_data_row(self, table: Table) -> Optional[TableRow]:
        """Return the first non-rule row of ``table``."""

    @abstractmethod
    def convert_grid_table(self, table: Table) -> str:
        """Convert a legacy grid-drawing table to wiki markup."""


class TreeExportInfo(ExportInfo):
    """Answer export queries by inspecting the document tree.

    Parameters
    ----------
    document : Document
        The tree being exported
    options : MediaWikiOptions or None, default = None
        Rendering options (export language)
    id_locations : mapping of str to str, optional
        ID to file path table for ``id`` links pointing into other files

    """

    def __init__(
        self,
        document: Document,
        options: MediaWikiOptions | None = None,
        id_locations: Mapping[str, str] | None = None,
    ):
        """Index the tree once."""
        self.document = document
        self.options = options or MediaWikiOptions()
        self.id_locations = dict(id_locations or {})

        self._custom_ids: dict[str, Headline] = {}
        self._ids: dict[str, Headline] = {}
        self._headlines: list[Headline] = []
        self._targets: dict[str, Target] = {}
        self._named: dict[str, Node] = {}
        self._radio_targets: list[RadioTarget] = []
        self._code_blocks: list[ExampleBlock] = []
        self._section_numbers: dict[int, list[int]] = {}
        self._sequence_numbers: dict[int, int] = {}
        self._tree = NodeIndex(document)

        self._index()

    def _index(self) -> None:
        captioned: dict[type, int] = {}
        for node in iter_nodes(self.document):
            if isinstance(node, Headline):
                self._headlines.append(node)
                if node.custom_id:
                    self._custom_ids.setdefault(node.custom_id, node)
                if node.id:
                    self._ids.setdefault(node.id, node)
            elif isinstance(node, Target):
                self._targets.setdefault(_normalize(node.value), node)
            elif isinstance(node, RadioTarget):
                self._radio_targets.append(node)
            elif isinstance(node, ExampleBlock):
                self._code_blocks.append(node)
            if isinstance(node, (Table, Paragraph)):
                if node.name:
                    self._named.setdefault(node.name, node)
                if node.caption:
                    captioned[type(node)] = captioned.get(type(node), 0) + 1
                    self._sequence_numbers[id(node)] = captioned[type(node)]
        self._number_headlines(self.document, [])

    def _number_headlines(self, node: Node, prefix: list[int]) -> None:
        count = 0
        for child in get_node_children(node):
            if isinstance(child, Headline) and not child.footnote_section:
                count += 1
                number = prefix + [count]
                self._section_numbers[id(child)] = number
                self._number_headlines(child, number)
            else:
                self._number_headlines(child, prefix)

    # ------------------------------------------------------------------
    # Link targets
    # ------------------------------------------------------------------

    def resolve_cross_reference(self, link: Link) -> Union[ExternalPath, Node, None]:
        """Resolve a ``custom-id`` or ``id`` link.

        ``custom-id`` links match a headline's CUSTOM_ID. ``id`` links match a
        headline's ID, then the ``id_locations`` table, which yields an
        :class:`ExternalPath`.

        """
        if link.link_type == "custom-id":
            return self._custom_ids.get(link.path)
        headline = self._ids.get(link.path)
        if headline is not None:
            return headline
        location = self.id_locations.get(link.path)
        if location is not None:
            return ExternalPath(location)
        logger.debug("Unresolved %s link: %s", link.link_type, link.path)
        return None

    def resolve_radio_target(self, link: Link) -> Optional[Node]:
        """Return the radio target whose text matches the link path, ignoring case."""
        wanted = _normalize(link.path).lower()
        for target in self._radio_targets:
            if _normalize(plain_text_of(target.children)).lower() == wanted:
                return target
        logger.debug("Unresolved radio link: %s", link.path)
        return None

    def resolve_fuzzy_target(self, link: Link) -> Optional[Node]:
        """Return the element a fuzzy link names.

        Dedicated targets win over named elements, which win over headline
        titles. A path starting with ``*`` only matches headlines.

        """
        path = link.path
        headlines_only = path.startswith("*")
        wanted = _normalize(path.lstrip("*") if headlines_only else path)

        if not headlines_only:
            if wanted in self._targets:
                return self._targets[wanted]
            if wanted in self._named:
                return self._named[wanted]

        for headline in self._headlines:
            if _normalize(plain_text_of(headline.title)) == wanted:
                return headline
        logger.debug("Unresolved fuzzy link: %s", path)
        return None

    def ordinal_of(self, node: Node) -> Optional[Ordinal]:
        """Return the number of ``node``.

        Headlines get their section number, captioned tables and paragraphs
        their position among captioned elements of the same kind, and
        dedicated targets the number of the headline they sit under.

        """
        if isinstance(node, Headline):
            number = self._section_numbers.get(id(node))
            return list(number) if number else None
        if isinstance(node, (Table, Paragraph)):
            return self._sequence_numbers.get(id(node))
        if isinstance(node, Target):
            for ancestor in self._tree.ancestors(node):
                if isinstance(ancestor, Headline):
                    return self.ordinal_of(ancestor)
        return None

    def is_inline_image(self, link: Link, rules: tuple[tuple[str, str], ...]) -> bool:
        """Return whether ``link`` displays an image.

        Links typed ``image`` always do. Other links qualify when they have
        no description and their path matches the rule for their type.

        """
        if link.link_type == "image":
            return True
        if link.children:
            return False
        return any(kind == link.link_type and re.search(pattern, link.path, re.IGNORECASE) for kind, pattern in rules)

    def resolve_code_reference(self, link: Link) -> Optional[tuple[str, Union[int, str]]]:
        """Find the ``(ref:label)`` cookie a ``coderef`` link points to.

        The value is the cookie's line number when its block numbers lines,
        the label otherwise. The format template is ``"%s"`` for links
        without description; otherwise the description with ``(label)``
        replaced by the placeholder.

        """
        label = link.path
        for block in self._code_blocks:
            for line_number, line in enumerate(block.value.splitlines(), start=1):
                match = _CODE_REFERENCE_RE.search(line)
                if match and match.group("label") == label:
                    value: Union[int, str] = line_number if block.number_lines else label
                    return self._coderef_format(link), value
        logger.debug("Unresolved code reference: %s", label)
        return None

    @staticmethod
    def _coderef_format(link: Link) -> str:
        if not link.children:
            return "%s"
        description = plain_text_of(link.children).replace("%", "%%")
        return description.replace(f"({link.path})", "%s")

    # ------------------------------------------------------------------
    # Element queries
    # ------------------------------------------------------------------

    def caption_of(self, node: Node) -> Optional[list[Node]]:
        """Return the caption of a table or paragraph."""
        caption = getattr(node, "caption", None)
        return list(caption) if caption else None

    def localize(self, key: str) -> str:
        """Translate ``key`` into the configured language."""
        return translate(key, self.options.language)

    def has_special_column(self, table: Table) -> bool:
        """Apply the special-column rule to ``table``.

        Every standard row must start with a marker cell (empty or one of
        ``# ! $ * _ ^ /``) and at least one marker must be non-empty.

        """
        markers: list[str] = []
        for row in get_node_children(table):
            if not isinstance(row, TableRow) or row.row_type == "rule":
                continue
            cells = [cell for cell in row.children if isinstance(cell, TableCell)]
            if not cells:
                return False
            marker = plain_text_of(cells[0].children).strip()
            if marker not in TABLE_SPECIAL_COLUMN_MARKERS:
                return False
            markers.append(marker)
        return any(markers)

    def first_data_row(self, table: Table) -> Optional[TableRow]:
        """Return the first standard row of ``table``."""
        for row in get_node_children(table):
            if isinstance(row, TableRow) and row.row_type == "standard":
                return row
        return None

    def convert_grid_table(self, table: Table) -> str:
        """Keep a grid table's drawing verbatim inside ``<pre>``."""
        return "<pre>\n" + table.raw_value.rstrip("\n") + "\n</pre>"


def _normalize(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()
