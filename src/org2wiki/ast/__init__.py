#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/ast/__init__.py
"""Abstract Syntax Tree (AST) module for outline documents.

The module consists of several components:

- nodes: AST node classes for parsed outline documents
- visitors: Visitor interface implemented by renderers
- index: Parent and sibling lookups over a tree
- spacing: Inter-element spacing pre-pass
- serialization: JSON serialization and deserialization of trees

Examples
--------
Basic usage:

    >>> from org2wiki.ast import Document, Headline, Paragraph, PlainText
    >>> from org2wiki.renderers.mediawiki import MediaWikiRenderer
    >>>
    >>> doc = Document(children=[
    ...     Headline(level=1, title=[PlainText("Title")], children=[
    ...         Paragraph(children=[PlainText("Hello world")])
    ...     ])
    ... ])
    >>> wiki = MediaWikiRenderer().render_to_string(doc)

"""

from __future__ import annotations

from org2wiki.ast.index import NodeIndex
from org2wiki.ast.nodes import (
    NODE_TYPES,
    Bold,
    CheckboxState,
    Code,
    Comment,
    Document,
    ExampleBlock,
    FootnoteDefinition,
    FootnoteReference,
    Headline,
    HorizontalRule,
    Italic,
    LineBreak,
    Link,
    ListItem,
    ListType,
    Node,
    Paragraph,
    PlainList,
    PlainText,
    QuoteBlock,
    RadioTarget,
    RowType,
    Section,
    Table,
    TableCell,
    TableRow,
    TableType,
    Target,
    Verbatim,
    get_node_children,
    get_secondary_content,
    iter_nodes,
    plain_text_of,
)
from org2wiki.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from org2wiki.ast.spacing import normalize_spacing
from org2wiki.ast.visitors import NodeVisitor

__all__ = [
    "NODE_TYPES",
    "Bold",
    "CheckboxState",
    "Code",
    "Comment",
    "Document",
    "ExampleBlock",
    "FootnoteDefinition",
    "FootnoteReference",
    "Headline",
    "HorizontalRule",
    "Italic",
    "LineBreak",
    "Link",
    "ListItem",
    "ListType",
    "Node",
    "NodeIndex",
    "NodeVisitor",
    "Paragraph",
    "PlainList",
    "PlainText",
    "QuoteBlock",
    "RadioTarget",
    "RowType",
    "Section",
    "Table",
    "TableCell",
    "TableRow",
    "TableType",
    "Target",
    "Verbatim",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "get_node_children",
    "get_secondary_content",
    "iter_nodes",
    "json_to_ast",
    "normalize_spacing",
    "plain_text_of",
]
