#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/ast/nodes.py
"""AST node classes for outline document representation.

This module defines the closed set of node kinds that the wiki transcoder
understands. Trees are produced by an external outline-markup parser and
handed to a renderer, which dispatches on node kind through the visitor
pattern.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes (elements) represent structural document elements:
    - Document, Section, Headline, Paragraph
    - PlainList, ListItem, Table, TableRow
    - QuoteBlock, ExampleBlock, HorizontalRule
    - FootnoteDefinition, Comment

Inline nodes (objects) represent text and formatting:
    - PlainText, Bold, Italic, Code, Verbatim
    - Link, LineBreak, FootnoteReference, TableCell
    - RadioTarget, Target

Spacing
-------
Every node carries ``post_blank``: the number of blank lines following a
block node, or the number of spaces following an inline node. ``None`` means
the parser did not record any.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Literal, Optional

ListType = Literal["ordered", "unordered", "descriptive"]
CheckboxState = Literal["on", "off", "trans"]
RowType = Literal["standard", "rule"]
TableType = Literal["org", "table.el"]


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    post_blank : int or None, default = None
        Trailing blank lines (block nodes) or spaces (inline nodes)
    metadata : dict, default = empty dict
        Arbitrary parser-supplied metadata

    """

    is_block: ClassVar[bool] = False
    separated: ClassVar[bool] = False

    post_blank: Optional[int]
    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        *args : Any
            Extra arguments forwarded to the visit method

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level sections and headlines
    metadata : dict, default = empty dict
        Document-level metadata (title, author, etc.)

    """

    is_block: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, *args)


@dataclass
class Section(Node):
    """Pure grouping node holding the body that precedes any sub-headline."""

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_section``."""
        return visitor.visit_section(self, *args)


@dataclass
class Headline(Node):
    """Headline node.

    Parameters
    ----------
    level : int
        Relative headline level, starting at 1
    title : list of Node, default = empty list
        Inline nodes making up the headline text
    children : list of Node, default = empty list
        Section body and sub-headlines
    todo_keyword : str or None, default = None
        TODO keyword (e.g. ``"TODO"``, ``"DONE"``)
    priority : str or None, default = None
        Single priority character (e.g. ``"A"``)
    tags : list of str, default = empty list
        Headline tags, without colons
    footnote_section : bool, default = False
        True for the auto-generated footnotes placeholder headline
    custom_id : str or None, default = None
        CUSTOM_ID property, target of ``custom-id`` links
    id : str or None, default = None
        ID property, target of ``id`` links

    """

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    level: int
    title: list[Node] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    todo_keyword: Optional[str] = None
    priority: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    footnote_section: bool = False
    custom_id: Optional[str] = None
    id: Optional[str] = None
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the headline level is positive."""
        if self.level < 1:
            raise ValueError(f"Headline level must be >= 1, got {self.level}")

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_headline``."""
        return visitor.visit_headline(self, *args)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes
    name : str or None, default = None
        Element name (``#+NAME:``), usable as a fuzzy link target
    caption : list of Node or None, default = None
        Caption, used for standalone images

    """

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    name: Optional[str] = None
    caption: Optional[list[Node]] = None
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, *args)


@dataclass
class PlainList(Node):
    """List node.

    Parameters
    ----------
    list_type : {'ordered', 'unordered', 'descriptive'}, default = 'unordered'
        Kind of list; items read it through their parent
    children : list of ListItem, default = empty list
        List items

    """

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    list_type: ListType = "unordered"
    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_plain_list``."""
        return visitor.visit_plain_list(self, *args)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Paragraphs and nested lists
    checkbox : {'on', 'off', 'trans'} or None, default = None
        Checkbox state
    tag : list of Node or None, default = None
        Term of a descriptive list item

    """

    is_block: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    checkbox: Optional[CheckboxState] = None
    tag: Optional[list[Node]] = None
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, *args)


@dataclass
class Table(Node):
    """Table node.

    Parameters
    ----------
    children : list of TableRow, default = empty list
        Rows in document order, rule rows included
    name : str or None, default = None
        Table name/label, usable as a fuzzy link target
    caption : list of Node or None, default = None
        Optional caption
    table_type : {'org', 'table.el'}, default = 'org'
        ``table.el`` tables are legacy grid drawings kept as raw text
    raw_value : str, default = ''
        Raw grid text for ``table.el`` tables

    """

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    name: Optional[str] = None
    caption: Optional[list[Node]] = None
    table_type: TableType = "org"
    raw_value: str = ""
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, *args)


@dataclass
class TableRow(Node):
    """Table row node; ``rule`` rows are horizontal separators without cells."""

    is_block: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    row_type: RowType = "standard"
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self, *args)


@dataclass
class QuoteBlock(Node):
    """Quote block containing other block elements."""

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_quote_block``."""
        return visitor.visit_quote_block(self, *args)


@dataclass
class ExampleBlock(Node):
    """Literal block: example, source or fixed-width.

    Parameters
    ----------
    value : str
        Raw literal content (not parsed)
    language : str or None, default = None
        Language of a source block
    number_lines : bool, default = False
        Whether code references resolve to line numbers
    retain_labels : bool, default = True
        Whether ``(ref:label)`` cookies stay in the output

    """

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    value: str
    language: Optional[str] = None
    number_lines: bool = False
    retain_labels: bool = True
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_example_block``."""
        return visitor.visit_example_block(self, *args)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule node."""

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_horizontal_rule``."""
        return visitor.visit_horizontal_rule(self, *args)


@dataclass
class FootnoteDefinition(Node):
    """Labelled footnote definition.

    Definitions are never rendered in place; the footnotes section collects
    them after the body.

    """

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    label: str
    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_definition``."""
        return visitor.visit_footnote_definition(self, *args)


@dataclass
class Comment(Node):
    """Comment block; never part of the output."""

    is_block: ClassVar[bool] = True
    separated: ClassVar[bool] = True

    value: str = ""
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_comment``."""
        return visitor.visit_comment(self, *args)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class PlainText(Node):
    """Plain text run."""

    value: str
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_plain_text``."""
        return visitor.visit_plain_text(self, *args)


@dataclass
class Bold(Node):
    """Bold span."""

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_bold``."""
        return visitor.visit_bold(self, *args)


@dataclass
class Italic(Node):
    """Italic span."""

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_italic``."""
        return visitor.visit_italic(self, *args)


@dataclass
class Code(Node):
    """Inline code span; ``value`` is raw and never escaped."""

    value: str
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self, *args)


@dataclass
class Verbatim(Node):
    """Inline verbatim span; rendered like Code."""

    value: str
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_verbatim``."""
        return visitor.visit_verbatim(self, *args)


@dataclass
class LineBreak(Node):
    """Forced line break."""

    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self, *args)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    link_type : str
        Type tag: ``custom-id``, ``id``, ``file``, ``http``, ``https``,
        ``ftp``, ``mailto``, ``coderef``, ``radio``, ``fuzzy`` or ``image``
    path : str
        Raw path/target, without the type prefix
    children : list of Node, default = empty list
        Link description; empty when the link has none

    """

    link_type: str
    path: str
    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, *args)


@dataclass
class FootnoteReference(Node):
    """Footnote reference.

    Parameters
    ----------
    label : str or None, default = None
        Footnote label; None for anonymous inline footnotes
    children : list of Node, default = empty list
        Inline definition (``[fn::text]`` or ``[fn:label:text]``); empty for
        references to a separate FootnoteDefinition

    """

    label: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def inline(self) -> bool:
        """Whether this reference carries its own definition."""
        return bool(self.children)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_reference``."""
        return visitor.visit_footnote_reference(self, *args)


@dataclass
class TableCell(Node):
    """Table cell with inline content."""

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self, *args)


@dataclass
class RadioTarget(Node):
    """Radio target (``<<<text>>>``); plain-text occurrences link to it."""

    children: list[Node] = field(default_factory=list)
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_radio_target``."""
        return visitor.visit_radio_target(self, *args)


@dataclass
class Target(Node):
    """Dedicated target (``<<name>>``); invisible in the output."""

    value: str
    post_blank: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_target``."""
        return visitor.visit_target(self, *args)


NODE_TYPES: tuple[type[Node], ...] = (
    Document,
    Section,
    Headline,
    Paragraph,
    PlainList,
    ListItem,
    Table,
    TableRow,
    QuoteBlock,
    ExampleBlock,
    HorizontalRule,
    FootnoteDefinition,
    Comment,
    PlainText,
    Bold,
    Italic,
    Code,
    Verbatim,
    LineBreak,
    Link,
    FootnoteReference,
    TableCell,
    RadioTarget,
    Target,
)


def get_node_children(node: Node) -> list[Node]:
    """Get the owned children of a node.

    Secondary content (headline titles, item tags, captions) is not part of
    the children; see :func:`get_secondary_content`.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaf nodes)

    """
    children = getattr(node, "children", None)
    if isinstance(children, list):
        return list(children)
    return []


def get_secondary_content(node: Node) -> list[Node]:
    """Get inline nodes a node renders outside of its children.

    Parameters
    ----------
    node : Node
        The node to inspect

    Returns
    -------
    list of Node
        Headline title, list item tag or caption nodes, in document order

    """
    if isinstance(node, Headline):
        return list(node.title)
    if isinstance(node, ListItem):
        return list(node.tag or [])
    if isinstance(node, (Table, Paragraph)):
        return list(node.caption or [])
    return []


def iter_nodes(node: Node) -> Iterator[Node]:
    """Iterate over a subtree in document order.

    The node itself is yielded first, then its secondary content, then its
    children, each recursively.

    Parameters
    ----------
    node : Node
        Root of the subtree

    Yields
    ------
    Node
        Every node of the subtree

    """
    yield node
    for child in get_secondary_content(node):
        yield from iter_nodes(child)
    for child in get_node_children(node):
        yield from iter_nodes(child)


def plain_text_of(nodes: list[Node]) -> str:
    """Concatenate the raw text of inline nodes, ignoring markup.

    Used to compare headline titles and radio targets against link paths.

    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (PlainText, Code, Verbatim)):
            parts.append(node.value)
        elif isinstance(node, Link) and not node.children:
            parts.append(node.path)
        elif isinstance(node, FootnoteReference):
            continue
        else:
            parts.append(plain_text_of(get_node_children(node)))
        if getattr(node, "post_blank", None):
            parts.append(" " * node.post_blank)
    return "".join(parts)
