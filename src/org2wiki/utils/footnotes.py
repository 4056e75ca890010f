#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/utils/footnotes.py
"""Footnote collection and numbering for a single export."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple, Union

from org2wiki.ast.nodes import (
    FootnoteDefinition,
    FootnoteReference,
    Node,
    get_node_children,
    get_secondary_content,
    iter_nodes,
)

logger = logging.getLogger(__name__)

FootnoteKey = Tuple[str, Union[str, int]]


@dataclass
class FootnoteRegistry:
    """Number footnotes in order of first reference.

    A footnote is identified by its label, or by the reference node itself
    for anonymous inline footnotes. The first reference to a footnote fixes
    its number; later references to the same footnote reuse it.

    Numbers are collected eagerly from the document in reading order, so a
    reference in a headline title is numbered before references in the
    headline's body, and references nested inside a footnote definition are
    numbered right after the footnote that contains them. References the
    collection pass never saw are numbered when first looked up.

    The registry belongs to exactly one export and must not be shared.

    Examples
    --------
        >>> registry = FootnoteRegistry.from_document(document)
        >>> registry.reference_number(first_reference)
        1

    """

    _numbers: dict[FootnoteKey, int] = field(default_factory=dict, init=False, repr=False)
    _order: list[FootnoteKey] = field(default_factory=list, init=False, repr=False)
    _contents: dict[FootnoteKey, Optional[list[Node]]] = field(default_factory=dict, init=False, repr=False)
    _labelled: dict[str, FootnoteDefinition] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_document(cls, document: Node) -> FootnoteRegistry:
        """Create a registry holding the numbering of ``document``."""
        registry = cls()
        for node in iter_nodes(document):
            if isinstance(node, FootnoteDefinition):
                registry._labelled.setdefault(node.label, node)
        registry._collect([document])
        logger.debug("Collected %d footnote(s)", len(registry._order))
        return registry

    @staticmethod
    def identity(reference: FootnoteReference) -> FootnoteKey:
        """Return the key identifying the footnote ``reference`` points to."""
        if reference.label:
            return ("label", reference.label)
        return ("anonymous", id(reference))

    def reference_number(self, reference: FootnoteReference) -> int:
        """Return the number of the footnote ``reference`` points to.

        Unknown footnotes get the next free number.

        """
        key = self.identity(reference)
        number = self._numbers.get(key)
        if number is None:
            logger.debug("Footnote %s first met during rendering", key[1])
            number = self._assign(key, reference)
        return number

    def definition_of(self, reference: FootnoteReference) -> Optional[list[Node]]:
        """Return the definition contents for ``reference``, or None when undefined."""
        if reference.inline:
            return list(reference.children)
        definition = self._labelled.get(reference.label or "")
        if definition is not None:
            return list(definition.children)
        return self._contents.get(self.identity(reference))

    def iter_definitions(self) -> Iterator[tuple[int, list[Node]]]:
        """Yield ``(number, contents)`` per footnote in numbering order.

        Footnotes referenced but never defined are skipped.

        """
        for key in self._order:
            contents = self._contents.get(key)
            if contents is None:
                logger.debug("Footnote %s has no definition", key[1])
                continue
            yield self._numbers[key], contents

    def __len__(self) -> int:
        return len(self._order)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _assign(self, key: FootnoteKey, reference: FootnoteReference) -> int:
        number = max(self._numbers.values(), default=0) + 1
        self._numbers[key] = number
        self._order.append(key)
        self._contents[key] = self.definition_of(reference)
        return number

    def _collect(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            if isinstance(node, FootnoteDefinition):
                # Numbered through their first reference, not their position
                continue
            if isinstance(node, FootnoteReference):
                key = self.identity(node)
                if key not in self._numbers:
                    self._assign(key, node)
                    definition = None if node.inline else self._labelled.get(node.label or "")
                    if definition is not None:
                        self._collect(definition.children)
                elif self._contents.get(key) is None and node.inline:
                    self._contents[key] = list(node.children)
            self._collect(get_secondary_content(node))
            self._collect(get_node_children(node))
