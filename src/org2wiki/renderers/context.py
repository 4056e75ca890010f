#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/renderers/context.py
"""Per-export rendering context."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2wiki.ast.index import NodeIndex
from org2wiki.ast.nodes import Document, Node, Table, TableCell, TableRow, plain_text_of
from org2wiki.export_info import ExportInfo
from org2wiki.options.mediawiki import MediaWikiOptions
from org2wiki.utils.footnotes import FootnoteRegistry

# Marker cells of rows that only carry spreadsheet metadata
_SPECIAL_ROW_MARKERS = frozenset({"!", "^", "_", "$", "/"})


@dataclass
class RenderContext:
    """Everything a formatter may consult while rendering one document.

    A context is created by the renderer for a single export and dropped
    afterwards. Its footnote registry and caches are mutable, so a context
    must never be shared between exports.

    Parameters
    ----------
    options : MediaWikiOptions
        Rendering options
    export_info : ExportInfo
        Link, caption and table queries
    index : NodeIndex
        Parent and sibling lookups
    footnotes : FootnoteRegistry
        Footnote numbering table

    """

    options: MediaWikiOptions
    export_info: ExportInfo
    index: NodeIndex
    footnotes: FootnoteRegistry
    _special_columns: dict[int, bool] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def create(cls, document: Document, options: MediaWikiOptions, export_info: ExportInfo) -> RenderContext:
        """Build the index and footnote numbering for ``document``."""
        return cls(
            options=options,
            export_info=export_info,
            index=NodeIndex(document),
            footnotes=FootnoteRegistry.from_document(document),
        )

    def has_special_column(self, table: Table) -> bool:
        """Memoized :meth:`ExportInfo.has_special_column`."""
        key = id(table)
        if key not in self._special_columns:
            self._special_columns[key] = self.export_info.has_special_column(table)
        return self._special_columns[key]

    def table_of(self, node: Node) -> Table | None:
        """Return the table owning a row or cell."""
        for ancestor in self.index.ancestors(node):
            if isinstance(ancestor, Table):
                return ancestor
        return None

    def in_special_column(self, cell: TableCell) -> bool:
        """Return whether ``cell`` is the marker cell of a special column."""
        if self.index.position(cell) != 0:
            return False
        table = self.table_of(cell)
        return table is not None and self.has_special_column(table)

    def is_special_row(self, row: TableRow) -> bool:
        """Return whether ``row`` only carries spreadsheet metadata (``!``, ``^``, ``_``, ``$``, ``/``)."""
        table = self.table_of(row)
        if table is None or not self.has_special_column(table):
            return False
        cells = [cell for cell in row.children if isinstance(cell, TableCell)]
        return bool(cells) and plain_text_of(cells[0].children).strip() in _SPECIAL_ROW_MARKERS
