#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

Parsed trees reach the transcoder as JSON produced by an external parser.
Every node is an object with a ``node_type`` field naming its class; the
remaining fields mirror the dataclass fields of that class. Fields holding
inline sequences (``children``, ``title``, ``tag``, ``caption``) are lists
of node objects.

Examples
--------
Serialize AST to JSON:

    >>> from org2wiki.ast import Document, Paragraph, PlainText
    >>> from org2wiki.ast.serialization import ast_to_json
    >>>
    >>> doc = Document(children=[Paragraph(children=[PlainText("Hello")])])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> from org2wiki.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].children[0].value
    'Hello'

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any

from org2wiki.ast.nodes import NODE_TYPES, Node, PlainText
from org2wiki.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Fields holding sequences of nodes rather than plain values
_NODE_LIST_FIELDS = frozenset({"children", "title", "tag", "caption"})

_NODE_CLASSES: dict[str, type[Node]] = {cls.__name__: cls for cls in NODE_TYPES}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node is not one of the known node types

    Examples
    --------
    >>> ast_to_dict(PlainText("Hello"))
    {'node_type': 'PlainText', 'value': 'Hello', 'post_blank': None, 'metadata': {}}

    """
    if type(node) not in NODE_TYPES:
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")

    result: dict[str, Any] = {"node_type": type(node).__name__}
    for node_field in fields(node):  # type: ignore[arg-type]
        value = getattr(node, node_field.name)
        if node_field.name in _NODE_LIST_FIELDS and value is not None:
            value = [ast_to_dict(child) for child in value]
        elif node_field.name == "metadata":
            value = dict(value)
        elif isinstance(value, list):
            value = list(value)
        result[node_field.name] = value
    return result


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise on unknown node types and unknown fields.
        If False, log a warning, replace unknown nodes with empty text and
        drop unknown fields.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the dictionary does not describe a valid node

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}")

    node_type = data.get("node_type")
    node_class = _NODE_CLASSES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        if strict_mode:
            raise ParsingError(f"Unknown node type: {node_type!r}", node_type=str(node_type))
        logger.warning("Unknown node type %r, skipping", node_type)
        return PlainText(value="")

    known = {node_field.name for node_field in fields(node_class)}  # type: ignore[arg-type]
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "node_type":
            continue
        if key not in known:
            if strict_mode:
                raise ParsingError(f"Unknown field {key!r} for {node_type}", node_type=node_type)
            logger.warning("Dropping unknown field %r of %s", key, node_type)
            continue
        if key in _NODE_LIST_FIELDS and value is not None:
            if not isinstance(value, list):
                raise ParsingError(f"Field {key!r} of {node_type} must be a list", node_type=node_type)
            value = [dict_to_ast(child, strict_mode=strict_mode) for child in value]
        kwargs[key] = value

    try:
        return node_class(**kwargs)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid {node_type} node: {e}", node_type=node_type, original_error=e) from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    A missing ``schema_version`` is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        See :func:`dict_to_ast`

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the JSON is malformed, has an unsupported schema version, or does
        not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Malformed document JSON: {e}", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Document JSON must be an object")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of org2wiki supports schema version {SCHEMA_VERSION} only."
        )
    return dict_to_ast(data, strict_mode=strict_mode)
