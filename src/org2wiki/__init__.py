"""org2wiki - export parsed outline documents to MediaWiki markup.

org2wiki takes the tree produced by an outline-document parser (headlines,
paragraphs, lists, tables, footnotes, links and inline markup) and renders
it as MediaWiki wikitext. The parser itself is not part of this package: trees
are built in Python from :mod:`org2wiki.ast` nodes or loaded from JSON.

Examples
--------
Render a tree built in Python:

    >>> from org2wiki import render
    >>> from org2wiki.ast import Document, Headline, Paragraph, PlainText
    >>> doc = Document(children=[
    ...     Headline(level=1, title=[PlainText("Intro")], children=[
    ...         Paragraph(children=[PlainText("Hello")])
    ...     ])
    ... ])
    >>> print(render(doc))
    = Intro =
    Hello

Render a JSON tree file with custom options:

    >>> from org2wiki import MediaWikiOptions, load_document, render
    >>> doc = load_document("notes.json")
    >>> wiki = render(doc, MediaWikiOptions(headline_style="setext"))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from org2wiki.api import load_document, render
from org2wiki.exceptions import Org2WikiError, ParsingError, ValidationError
from org2wiki.export_info import ExportInfo, TreeExportInfo
from org2wiki.options.mediawiki import MediaWikiOptions
from org2wiki.renderers.mediawiki import MediaWikiRenderer

__all__ = [
    "ExportInfo",
    "MediaWikiOptions",
    "MediaWikiRenderer",
    "Org2WikiError",
    "ParsingError",
    "TreeExportInfo",
    "ValidationError",
    "__version__",
    "load_document",
    "render",
]
