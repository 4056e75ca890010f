#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/api.py
"""High-level entry points: load a parsed tree and render it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from org2wiki.ast.nodes import Document
from org2wiki.ast.serialization import json_to_ast
from org2wiki.exceptions import ParsingError
from org2wiki.export_info import ExportInfo
from org2wiki.options.mediawiki import MediaWikiOptions
from org2wiki.renderers.mediawiki import MediaWikiRenderer

logger = logging.getLogger(__name__)


def load_document(source: Union[str, Path, IO[str]], strict_mode: bool = True) -> Document:
    """Load a parsed document tree from JSON.

    Parameters
    ----------
    source : str, Path or IO[str]
        Path to a JSON file, or an open text stream
    strict_mode : bool, default True
        Reject unknown node types and fields instead of skipping them

    Returns
    -------
    Document
        Root of the loaded tree

    Raises
    ------
    ParsingError
        If the input is not UTF-8 text or its JSON does not describe a
        document tree
    OSError
        If the file cannot be read

    """
    try:
        if isinstance(source, (str, Path)):
            text = Path(source).read_text(encoding="utf-8")
        else:
            text = source.read()
    except UnicodeDecodeError as e:
        raise ParsingError(f"Input is not valid UTF-8: {e}", original_error=e) from e

    node = json_to_ast(text, strict_mode=strict_mode)
    if not isinstance(node, Document):
        raise ParsingError(f"Top-level node must be a Document, got {type(node).__name__}", node_type=type(node).__name__)
    logger.debug("Loaded document with %d top-level node(s)", len(node.children))
    return node


def render(
    document: Document,
    options: MediaWikiOptions | None = None,
    export_info: ExportInfo | None = None,
) -> str:
    """Render a document tree to MediaWiki markup.

    Parameters
    ----------
    document : Document
        Parsed document tree; its spacing is normalized in place
    options : MediaWikiOptions, optional
        Rendering options
    export_info : ExportInfo, optional
        Export queries for this document, defaults to answering them from
        the tree itself

    Returns
    -------
    str
        MediaWiki markup ending in a single newline

    Examples
    --------
        >>> from org2wiki import render
        >>> from org2wiki.ast import Document, Paragraph, PlainText
        >>> render(Document(children=[Paragraph(children=[PlainText("Hello")])]))
        'Hello\\n'

    """
    return MediaWikiRenderer(options).render_to_string(document, export_info=export_info)
