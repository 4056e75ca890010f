#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/ast/spacing.py
"""Inter-element spacing normalization.

Wiki markup relies on blank lines to separate paragraphs, lists and tables.
Before rendering, every separated block element below the root gets at least
one trailing blank line. Larger spacing recorded by the parser is kept.

"""

from __future__ import annotations

import logging

from org2wiki.ast.nodes import Node, iter_nodes

logger = logging.getLogger(__name__)


def normalize_spacing(root: Node) -> int:
    """Raise the trailing blank lines of block elements to at least one.

    The tree is modified in place. Running the pass again leaves the tree
    unchanged.

    Parameters
    ----------
    root : Node
        Root of the tree; the root itself is never modified

    Returns
    -------
    int
        Number of nodes whose spacing changed

    """
    changed = 0
    for node in iter_nodes(root):
        if node is root or not isinstance(node, Node) or not node.separated:
            continue
        spacing = max(1, node.post_blank or 0)
        if spacing != node.post_blank:
            node.post_blank = spacing
            changed += 1
    logger.debug("Spacing pre-pass updated %d node(s)", changed)
    return changed
