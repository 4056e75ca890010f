#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2wiki/renderers/mediawiki.py
"""MediaWiki rendering from an outline document tree.

This module provides the MediaWikiRenderer class which converts AST nodes
to MediaWiki markup text. Rendering is post-order: every node receives the
already rendered markup of its children and returns its own markup. Spacing
between siblings comes from their ``post_blank`` values, which a pre-pass
raises to at least one blank line for separated block elements.

"""

from __future__ import annotations

import logging
import re
import textwrap
from typing import Callable, Optional

from org2wiki.ast.nodes import (
    NODE_TYPES,
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
    Node,
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
    get_node_children,
)
from org2wiki.ast.spacing import normalize_spacing
from org2wiki.ast.visitors import NodeVisitor
from org2wiki.constants import (
    CHECKBOX_MARKERS,
    CODE_REFERENCE_PATTERN,
    EXAMPLE_BLOCK_INDENT,
    FOOTNOTE_DEFINITION_FORMAT,
    HEADLINE_STYLES,
    HEADLINE_TAGS_SEPARATOR,
    HORIZONTAL_RULE_MARKUP,
    LINE_BREAK_MARKUP,
    ORDERED_BULLET,
    QUOTE_BLOCK_CLOSE,
    QUOTE_BLOCK_OPEN,
    UNORDERED_BULLET,
    URL_LINK_TYPES,
)
from org2wiki.export_info import ExportInfo, ExternalPath, TreeExportInfo
from org2wiki.options.mediawiki import MediaWikiOptions
from org2wiki.renderers.base import BaseRenderer
from org2wiki.renderers.context import RenderContext
from org2wiki.renderers.links import file_uri, format_ordinal, normalize_image_path, rewrite_source_extension
from org2wiki.utils.escape import escape_paragraph_start, escape_wiki_text
from org2wiki.utils.text import convert_special_strings, educate_quotes, preserve_breaks

logger = logging.getLogger(__name__)

ExportInfoFactory = Callable[[Document, MediaWikiOptions], ExportInfo]

_TRAILING_LINES_RE = re.compile(r"(?:\n[ \t]*)*\Z")
_CODE_REFERENCE_COOKIE_RE = re.compile(r"[ \t]*" + CODE_REFERENCE_PATTERN)
_NESTED_ITEM_MARKERS = (UNORDERED_BULLET, ORDERED_BULLET)
_FORMAT_PLACEHOLDER_RE = re.compile(r"(?<!%)(?:%%)*%s")


def _normalize_block(output: str) -> str:
    """End block output with exactly one newline; blank output becomes empty."""
    if not output.strip():
        return ""
    return _TRAILING_LINES_RE.sub("\n", output, count=1)


def _format_code(value: str) -> str:
    """Wrap inline code, switching to ``<code>`` when the value holds backticks."""
    if "`" not in value:
        return f"`{value}`"
    if value.startswith("`") or value.endswith("`"):
        return f"<code> {value} </code>"
    return f"<code>{value}</code>"


class MediaWikiRenderer(NodeVisitor, BaseRenderer):
    """Render outline document trees to MediaWiki markup text.

    The renderer itself holds only configuration. All per-document state
    (node index, footnote numbering, export queries) lives in a
    :class:`RenderContext` created for each call to :meth:`render_to_string`,
    so one renderer may serve several exports at once.

    Parameters
    ----------
    options : MediaWikiOptions or None, default = None
        MediaWiki rendering options
    export_info_factory : callable, optional
        Builds the :class:`ExportInfo` for a document; defaults to
        :class:`TreeExportInfo`

    Examples
    --------
    Basic usage:

        >>> from org2wiki.ast import Document, Headline, PlainText
        >>> from org2wiki.renderers.mediawiki import MediaWikiRenderer
        >>> doc = Document(children=[
        ...     Headline(level=1, title=[PlainText("Title")])
        ... ])
        >>> print(MediaWikiRenderer().render_to_string(doc))
        = Title =

    """

    def __init__(
        self,
        options: MediaWikiOptions | None = None,
        export_info_factory: Optional[ExportInfoFactory] = None,
    ):
        """Initialize the MediaWiki renderer with options."""
        BaseRenderer._validate_options_type(options, MediaWikiOptions, "mediawiki")
        options = options or MediaWikiOptions()
        BaseRenderer.__init__(self, options)
        self.options: MediaWikiOptions = options
        self.export_info_factory: ExportInfoFactory = export_info_factory or TreeExportInfo

    def render_to_string(self, document: Document, export_info: ExportInfo | None = None) -> str:
        """Render a document AST to MediaWiki markup string.

        The tree's spacing is normalized in place before rendering.

        Parameters
        ----------
        document : Document
            The document node to render
        export_info : ExportInfo or None, default = None
            Export queries for this document; built with the renderer's
            factory when omitted

        Returns
        -------
        str
            MediaWiki markup text ending in a single newline

        """
        if self.options.headline_style not in HEADLINE_STYLES:
            logger.warning("Unsupported headline style %r, using 'atx'", self.options.headline_style)
        normalize_spacing(document)
        if export_info is None:
            export_info = self.export_info_factory(document, self.options)
        context = RenderContext.create(document, self.options, export_info)

        result = self.render_node(document, context)
        return result.rstrip() + "\n"

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def render_node(self, node: Node, context: RenderContext) -> str:
        """Render ``node`` after rendering its children.

        Nodes of unknown kind render as empty text.

        """
        if not isinstance(node, NODE_TYPES):
            logger.debug("Skipping unknown node type %s", type(node).__name__)
            return ""
        contents = self.render_nodes(get_node_children(node), context)
        return node.accept(self, contents, context)

    def render_nodes(self, nodes: list[Node], context: RenderContext) -> str:
        """Render a sequence of siblings and join them with their spacing.

        Block output is trimmed to end in one newline, then followed by
        ``post_blank`` newlines; empty block output contributes nothing.
        Inline output is followed by ``post_blank`` spaces.

        """
        parts: list[str] = []
        for node in nodes:
            output = self.render_node(node, context)
            if not isinstance(node, NODE_TYPES):
                continue
            spacing = node.post_blank or 0
            if node.is_block:
                output = _normalize_block(output)
                if output:
                    parts.append(output + "\n" * spacing)
            else:
                parts.append(output + " " * spacing)
        return "".join(parts)

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, contents: str, context: RenderContext) -> str:
        """Render a Document node through the inner and outer templates."""
        return self.template(self.inner_template(contents, context), context)

    def inner_template(self, contents: str, context: RenderContext) -> str:
        """Append the footnotes section to the document body."""
        section = self.build_footnote_section(context)
        if not section:
            return contents
        if not contents.strip():
            return section
        return contents.rstrip("\n") + "\n\n" + section

    def template(self, contents: str, context: RenderContext) -> str:
        """Wrap the finished document; MediaWiki needs no wrapper."""
        return contents

    def build_footnote_section(self, context: RenderContext) -> str:
        """Build the footnotes section, or an empty string when nothing is defined.

        Definitions appear in numbering order, each as ``[n] text``.

        """
        entries: list[str] = []
        for number, definition in context.footnotes.iter_definitions():
            text = self.render_nodes(definition, context).strip()
            entries.append(FOOTNOTE_DEFINITION_FORMAT % (number, text))
        if not entries:
            return ""
        title = context.export_info.localize("Footnotes")
        return self.options.footnotes_section_template % (title, "\n".join(entries))

    # ------------------------------------------------------------------
    # Block elements
    # ------------------------------------------------------------------

    def visit_section(self, node: Section, contents: str, context: RenderContext) -> str:
        """Render a Section node as its contents."""
        return contents

    def visit_headline(self, node: Headline, contents: str, context: RenderContext) -> str:
        """Render a Headline node.

        ``atx`` style wraps the heading in ``level`` equals signs. ``setext``
        underlines it with ``=`` (level 1) or ``-``. The footnotes headline
        is dropped together with its subtree.

        """
        if node.footnote_section:
            return ""

        options = context.options
        title = self.render_nodes(node.title, context)
        todo = f"{node.todo_keyword} " if options.with_todo_keywords and node.todo_keyword else ""
        priority = f"[#{node.priority}] " if options.with_priority and node.priority else ""
        heading = f"{todo}{priority}{title}"
        tags = ""
        if options.with_tags and node.tags:
            tags = f"{HEADLINE_TAGS_SEPARATOR}:{':'.join(node.tags)}:"

        if options.headline_style == "setext":
            underline = ("=" if node.level == 1 else "-") * len(heading)
            return f"{heading}{tags}\n{underline}\n\n{contents}"

        marker = "=" * node.level
        return f"{marker} {heading}{tags} {marker}\n{contents}"

    def visit_paragraph(self, node: Paragraph, contents: str, context: RenderContext) -> str:
        """Render a Paragraph node, escaping a ``#`` that would open a numbered list."""
        first = node.children[0] if node.children else None
        if isinstance(first, PlainText) and first.value.startswith("#"):
            return escape_paragraph_start(contents)
        return contents

    def visit_plain_list(self, node: PlainList, contents: str, context: RenderContext) -> str:
        """Render a PlainList node as its items."""
        return contents

    def visit_list_item(self, node: ListItem, contents: str, context: RenderContext) -> str:
        """Render a ListItem node.

        Every non-blank line of the item is prefixed with the list bullet, so
        continuation lines stay inside the list and nested items deepen to
        ``**`` or ``#*``.

        """
        parent = context.index.parent(node)
        list_type = parent.list_type if isinstance(parent, PlainList) else "unordered"
        bullet = ORDERED_BULLET if list_type == "ordered" else UNORDERED_BULLET

        checkbox = CHECKBOX_MARKERS.get(node.checkbox or "", "")
        tag = ""
        if list_type == "descriptive" and node.tag:
            tag = f"**{self.render_nodes(node.tag, context).strip()}:** "
        prefix = f"{checkbox}{tag}"
        text = f"{prefix}{contents.strip()}"

        lines: list[str] = []
        for line in text.split("\n"):
            if not line.strip():
                continue
            # Lines of a nested list already start with its bullets
            nested = (bool(lines) or not prefix) and line.startswith(_NESTED_ITEM_MARKERS)
            separator = "" if nested else " "
            lines.append(f"{bullet}{separator}{line}\n")
        return "".join(lines)

    def visit_table(self, node: Table, contents: str, context: RenderContext) -> str:
        """Render a Table node.

        Layout is the opening line with the table class, the caption line,
        the column declaration line, the rows and the closing ``|}``.
        Grid-drawing tables are handed to :meth:`ExportInfo.convert_grid_table`.

        """
        if node.table_type == "table.el":
            return context.export_info.convert_grid_table(node)

        table_class = context.options.default_table_class
        attributes = f"class={table_class}" if table_class else ""
        caption = context.export_info.caption_of(node)
        caption_line = f"|+ {self.render_nodes(caption, context).strip()}\n" if caption else ""
        column_line = self._column_declarations(node, context)
        return f"{{| {attributes}\n{caption_line}\n{column_line}\n{contents}\n|}}"

    def _column_declarations(self, node: Table, context: RenderContext) -> str:
        row = context.export_info.first_data_row(node)
        if row is None:
            return ""
        cells = [cell for cell in row.children if isinstance(cell, TableCell)]
        if context.has_special_column(node):
            cells = cells[1:]
        return "".join(self._column_declaration(cell, context) for cell in cells)

    def _column_declaration(self, cell: TableCell, context: RenderContext) -> str:
        # MediaWiki tables do not declare columns up front
        return ""

    def visit_table_row(self, node: TableRow, contents: str, context: RenderContext) -> str:
        """Render a TableRow node as ``|-`` followed by its cells."""
        if node.row_type == "rule":
            return "|-\n"
        if context.is_special_row(node):
            return ""
        return f"|-\n{contents}"

    def visit_table_cell(self, node: TableCell, contents: str, context: RenderContext) -> str:
        """Render a TableCell node on its own ``|`` line."""
        if context.in_special_column(node):
            return ""
        return f"|{contents}\n"

    def visit_quote_block(self, node: QuoteBlock, contents: str, context: RenderContext) -> str:
        """Render a QuoteBlock node inside ``<blockquote>`` tags."""
        body = contents.rstrip("\n")
        return f"{QUOTE_BLOCK_OPEN}\n{body}\n{QUOTE_BLOCK_CLOSE}"

    def visit_example_block(self, node: ExampleBlock, contents: str, context: RenderContext) -> str:
        """Render an ExampleBlock node as an indented preformatted block.

        The common indentation of the source is removed before every line is
        indented by four spaces.

        """
        value = node.value
        if not node.retain_labels:
            value = _CODE_REFERENCE_COOKIE_RE.sub("", value)
        value = textwrap.dedent(value)
        return textwrap.indent(value, EXAMPLE_BLOCK_INDENT, lambda line: True)

    def visit_horizontal_rule(self, node: HorizontalRule, contents: str, context: RenderContext) -> str:
        """Render a HorizontalRule node."""
        return HORIZONTAL_RULE_MARKUP

    def visit_footnote_definition(self, node: FootnoteDefinition, contents: str, context: RenderContext) -> str:
        """Footnote definitions render in the footnotes section, not in place."""
        return ""

    def visit_comment(self, node: Comment, contents: str, context: RenderContext) -> str:
        """Comments are not exported."""
        return ""

    # ------------------------------------------------------------------
    # Inline elements
    # ------------------------------------------------------------------

    def visit_plain_text(self, node: PlainText, contents: str, context: RenderContext) -> str:
        """Render a PlainText node.

        Quotes are educated on the source text. Escaping follows, then the
        special strings and hard breaks.

        """
        options = context.options
        text = node.value
        if options.with_smart_quotes:
            text = educate_quotes(text)
        text = escape_wiki_text(text)
        if options.with_special_strings:
            text = convert_special_strings(text)
        if options.preserve_breaks:
            text = preserve_breaks(text)
        return text

    def visit_bold(self, node: Bold, contents: str, context: RenderContext) -> str:
        """Render a Bold node."""
        return f"'''{contents}'''"

    def visit_italic(self, node: Italic, contents: str, context: RenderContext) -> str:
        """Render an Italic node."""
        return f"''{contents}''"

    def visit_code(self, node: Code, contents: str, context: RenderContext) -> str:
        """Render a Code node."""
        return _format_code(node.value)

    def visit_verbatim(self, node: Verbatim, contents: str, context: RenderContext) -> str:
        """Render a Verbatim node."""
        return _format_code(node.value)

    def visit_line_break(self, node: LineBreak, contents: str, context: RenderContext) -> str:
        """Render a LineBreak node."""
        return LINE_BREAK_MARKUP

    def visit_footnote_reference(self, node: FootnoteReference, contents: str, context: RenderContext) -> str:
        """Render a FootnoteReference node as its numbered marker.

        A reference directly following another one is preceded by the
        footnote separator.

        """
        previous = context.index.previous_sibling(node)
        prefix = context.options.footnote_separator if isinstance(previous, FootnoteReference) else ""
        number = context.footnotes.reference_number(node)
        return prefix + context.options.footnote_reference_format % number

    def visit_radio_target(self, node: RadioTarget, contents: str, context: RenderContext) -> str:
        """Render a RadioTarget node as its text."""
        return contents

    def visit_target(self, node: Target, contents: str, context: RenderContext) -> str:
        """Dedicated targets are invisible."""
        return ""

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def visit_link(self, node: Link, contents: str, context: RenderContext) -> str:
        """Render a Link node.

        Dispatch is on the link type: code references, radio links, ID
        cross-references, fuzzy links, inline images, then everything else
        as an external link.

        """
        link_type = node.link_type
        if link_type == "coderef":
            return self._render_code_reference(node, contents, context)
        if link_type == "radio":
            return self._render_radio_link(node, contents, context)
        if link_type in ("custom-id", "id"):
            return self._render_cross_reference(node, contents, context)
        if link_type == "fuzzy":
            return self._render_fuzzy_link(node, contents, context)
        if context.export_info.is_inline_image(node, context.options.inline_image_rules):
            return self._render_image(node, context)
        return self._render_external_link(node, contents, context)

    def _render_code_reference(self, node: Link, description: str, context: RenderContext) -> str:
        resolved = context.export_info.resolve_code_reference(node)
        if resolved is None:
            return description
        template, value = resolved
        # A description without the label carries no placeholder
        if not _FORMAT_PLACEHOLDER_RE.search(template):
            return template.replace("%%", "%")
        return template % value

    def _render_radio_link(self, node: Link, description: str, context: RenderContext) -> str:
        target = context.export_info.resolve_radio_target(node)
        if target is None:
            return description
        return self.render_nodes(get_node_children(target), context)

    def _render_cross_reference(self, node: Link, description: str, context: RenderContext) -> str:
        destination = context.export_info.resolve_cross_reference(node)
        if isinstance(destination, ExternalPath):
            path = rewrite_source_extension(destination.path, context.options.file_extension)
            return f"[{description}]({path})" if description else f"<{path}>"
        if destination is None:
            return description

        number = format_ordinal(context.export_info.ordinal_of(destination))
        reference = ""
        if number:
            reference = "(" + context.export_info.localize("See section %s") % number + ")"
        return " ".join(part for part in (description, reference) if part)

    def _render_fuzzy_link(self, node: Link, description: str, context: RenderContext) -> str:
        if description.strip():
            return description
        target = context.export_info.resolve_fuzzy_target(node)
        if target is None:
            return ""
        return format_ordinal(context.export_info.ordinal_of(target)) or ""

    def _render_image(self, node: Link, context: RenderContext) -> str:
        path = normalize_image_path(node.path)
        owner = context.index.owning_element(node)
        caption_nodes = context.export_info.caption_of(owner) if owner is not None else None
        caption = self.render_nodes(caption_nodes, context).strip() if caption_nodes else ""
        return f"![{caption}]({path})"

    def _render_external_link(self, node: Link, description: str, context: RenderContext) -> str:
        path = node.path
        if node.link_type in URL_LINK_TYPES:
            target = f"{node.link_type}:{path}"
        elif node.link_type == "file":
            path = target = file_uri(rewrite_source_extension(path, context.options.file_extension))
        else:
            target = path
        if not description:
            return target
        return f"[{path} {description}]"
