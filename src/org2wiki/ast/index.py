#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/ast/index.py
"""Read-only navigation index over a document tree.

Nodes do not hold parent pointers. Formatters that need context ("is the
previous sibling a footnote reference?", "which list owns this item?") ask a
:class:`NodeIndex`, built once per export. Entries are keyed by node identity
because dataclass nodes compare by value.

"""

from __future__ import annotations

from typing import Iterator, Optional

from org2wiki.ast.nodes import Node, get_node_children, get_secondary_content


class NodeIndex:
    """Parent and sibling lookups for every node of a tree.

    Secondary content (headline titles, item tags, captions) is indexed too:
    its parent is the owning node and its siblings are the other nodes of the
    same title/tag/caption sequence.

    Parameters
    ----------
    root : Node
        Root of the tree to index

    Examples
    --------
        >>> index = NodeIndex(document)
        >>> index.parent(document.children[0]) is document
        True

    """

    def __init__(self, root: Node):
        """Build the index by walking the tree once."""
        self.root = root
        self._parents: dict[int, Node] = {}
        self._siblings: dict[int, list[Node]] = {}
        self._positions: dict[int, int] = {}
        self._order: list[Node] = []
        self._siblings[id(root)] = [root]
        self._positions[id(root)] = 0
        self._walk(root)

    def _walk(self, node: Node) -> None:
        self._order.append(node)
        for group in (get_secondary_content(node), get_node_children(node)):
            for position, child in enumerate(group):
                self._parents[id(child)] = node
                self._siblings[id(child)] = group
                self._positions[id(child)] = position
                self._walk(child)

    def __contains__(self, node: object) -> bool:
        return id(node) in self._positions

    def nodes(self) -> Iterator[Node]:
        """Iterate over every indexed node in document order."""
        return iter(self._order)

    def parent(self, node: Node) -> Optional[Node]:
        """Return the parent of ``node``, or None for the root and unknown nodes."""
        return self._parents.get(id(node))

    def siblings(self, node: Node) -> list[Node]:
        """Return the sequence ``node`` belongs to (including itself)."""
        return list(self._siblings.get(id(node), [node]))

    def position(self, node: Node) -> int:
        """Return the index of ``node`` among its siblings (0 when unknown)."""
        return self._positions.get(id(node), 0)

    def previous_sibling(self, node: Node) -> Optional[Node]:
        """Return the sibling immediately before ``node``, if any."""
        group = self._siblings.get(id(node))
        position = self._positions.get(id(node), 0)
        if not group or position == 0:
            return None
        return group[position - 1]

    def next_sibling(self, node: Node) -> Optional[Node]:
        """Return the sibling immediately after ``node``, if any."""
        group = self._siblings.get(id(node))
        if not group:
            return None
        position = self._positions[id(node)]
        if position + 1 >= len(group):
            return None
        return group[position + 1]

    def ancestors(self, node: Node) -> Iterator[Node]:
        """Iterate from the parent of ``node`` up to the root."""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def owning_element(self, node: Node) -> Optional[Node]:
        """Return the nearest block-level ancestor of ``node``.

        For a link inside a paragraph this is the paragraph, which is where
        captions of standalone images live.

        """
        for ancestor in self.ancestors(node):
            if ancestor.is_block:
                return ancestor
        return None
