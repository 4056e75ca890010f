#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/ast/visitors.py
"""Visitor pattern implementation for AST rendering.

Renderers subclass :class:`NodeVisitor` and implement one ``visit_*`` method
per node kind. Every method is abstract, so a renderer that forgets a node
kind cannot be instantiated: the set of formatters is closed and checked
when the class is built rather than silently falling through at runtime.

Each visit method receives the node, the already rendered ``contents`` of its
children (post-order traversal) and the per-export rendering context, and
returns the node's markup.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from org2wiki.ast.nodes import (
    Bold,
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
    Paragraph,
    PlainList,
    PlainText,
    QuoteBlock,
    RadioTarget,
    Section,
    Table,
    TableCell,
    TableRow,
    Target,
    Verbatim,
)

if TYPE_CHECKING:
    from org2wiki.renderers.context import RenderContext


class NodeVisitor(ABC):
    """Abstract base class for AST node formatters.

    Examples
    --------
    A visitor that only keeps plain text (every other method returns
    ``contents`` or an empty string):

        >>> class TextOnly(NodeVisitor):
        ...     def visit_plain_text(self, node, contents, context):
        ...         return node.value
        ...     # ... remaining visit_* methods ...

    """

    @abstractmethod
    def visit_document(self, node: Document, contents: str, context: RenderContext) -> str:
        """Format the document root node.

        Parameters
        ----------
        node : Document
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_section(self, node: Section, contents: str, context: RenderContext) -> str:
        """Format a section body node.

        Parameters
        ----------
        node : Section
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_headline(self, node: Headline, contents: str, context: RenderContext) -> str:
        """Format a headline node.

        Parameters
        ----------
        node : Headline
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, contents: str, context: RenderContext) -> str:
        """Format a paragraph node.

        Parameters
        ----------
        node : Paragraph
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_plain_list(self, node: PlainList, contents: str, context: RenderContext) -> str:
        """Format a plain list node.

        Parameters
        ----------
        node : PlainList
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_list_item(self, node: ListItem, contents: str, context: RenderContext) -> str:
        """Format a list item node.

        Parameters
        ----------
        node : ListItem
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_table(self, node: Table, contents: str, context: RenderContext) -> str:
        """Format a table node.

        Parameters
        ----------
        node : Table
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_table_row(self, node: TableRow, contents: str, context: RenderContext) -> str:
        """Format a table row node.

        Parameters
        ----------
        node : TableRow
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_table_cell(self, node: TableCell, contents: str, context: RenderContext) -> str:
        """Format a table cell node.

        Parameters
        ----------
        node : TableCell
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_quote_block(self, node: QuoteBlock, contents: str, context: RenderContext) -> str:
        """Format a quote block node.

        Parameters
        ----------
        node : QuoteBlock
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_example_block(self, node: ExampleBlock, contents: str, context: RenderContext) -> str:
        """Format a literal block node.

        Parameters
        ----------
        node : ExampleBlock
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule, contents: str, context: RenderContext) -> str:
        """Format a horizontal rule node.

        Parameters
        ----------
        node : HorizontalRule
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition, contents: str, context: RenderContext) -> str:
        """Format a footnote definition node.

        Parameters
        ----------
        node : FootnoteDefinition
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_comment(self, node: Comment, contents: str, context: RenderContext) -> str:
        """Format a comment node.

        Parameters
        ----------
        node : Comment
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_plain_text(self, node: PlainText, contents: str, context: RenderContext) -> str:
        """Format a plain text run node.

        Parameters
        ----------
        node : PlainText
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_bold(self, node: Bold, contents: str, context: RenderContext) -> str:
        """Format a bold span node.

        Parameters
        ----------
        node : Bold
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_italic(self, node: Italic, contents: str, context: RenderContext) -> str:
        """Format an italic span node.

        Parameters
        ----------
        node : Italic
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_code(self, node: Code, contents: str, context: RenderContext) -> str:
        """Format an inline code span node.

        Parameters
        ----------
        node : Code
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_verbatim(self, node: Verbatim, contents: str, context: RenderContext) -> str:
        """Format an inline verbatim span node.

        Parameters
        ----------
        node : Verbatim
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_line_break(self, node: LineBreak, contents: str, context: RenderContext) -> str:
        """Format a line break node.

        Parameters
        ----------
        node : LineBreak
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_link(self, node: Link, contents: str, context: RenderContext) -> str:
        """Format a link node.

        Parameters
        ----------
        node : Link
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference, contents: str, context: RenderContext) -> str:
        """Format a footnote reference node.

        Parameters
        ----------
        node : FootnoteReference
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_radio_target(self, node: RadioTarget, contents: str, context: RenderContext) -> str:
        """Format a radio target node.

        Parameters
        ----------
        node : RadioTarget
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """

    @abstractmethod
    def visit_target(self, node: Target, contents: str, context: RenderContext) -> str:
        """Format a dedicated target node.

        Parameters
        ----------
        node : Target
            The node to format
        contents : str
            Rendered children of the node
        context : RenderContext
            Per-export rendering context

        Returns
        -------
        str
            Markup for this node

        """
