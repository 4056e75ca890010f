"""Unit tests for AST JSON serialization."""

import json

import pytest

from org2wiki.ast import (
    Document,
    FootnoteReference,
    Headline,
    Link,
    ListItem,
    Paragraph,
    PlainList,
    PlainText,
    Table,
    TableCell,
    TableRow,
    ast_to_dict,
    ast_to_json,
    dict_to_ast,
    json_to_ast,
)
from org2wiki.ast.serialization import SCHEMA_VERSION
from org2wiki.exceptions import ParsingError


@pytest.mark.unit
class TestAstToDict:
    """Tests for ast_to_dict."""

    def test_plain_text(self) -> None:
        """Leaf nodes serialize their fields after the type tag."""
        assert ast_to_dict(PlainText("Hello", post_blank=1)) == {
            "node_type": "PlainText",
            "value": "Hello",
            "post_blank": 1,
            "metadata": {},
        }

    def test_nested_node_lists(self) -> None:
        """Children and titles are serialized recursively."""
        headline = Headline(level=2, title=[PlainText("T")], tags=["x"], children=[Paragraph()])
        data = ast_to_dict(headline)
        assert data["title"][0]["node_type"] == "PlainText"
        assert data["children"][0]["node_type"] == "Paragraph"
        assert data["tags"] == ["x"]

    def test_unset_caption_stays_none(self) -> None:
        """Optional node lists serialize as null."""
        assert ast_to_dict(Table())["caption"] is None

    def test_unknown_node_type(self) -> None:
        """Objects outside the node set are rejected."""
        with pytest.raises(ValueError):
            ast_to_dict(object())  # type: ignore[arg-type]


@pytest.mark.unit
class TestDictToAst:
    """Tests for dict_to_ast."""

    def test_builds_nested_tree(self) -> None:
        """Node objects become node instances."""
        node = dict_to_ast(
            {
                "node_type": "PlainList",
                "list_type": "descriptive",
                "children": [
                    {
                        "node_type": "ListItem",
                        "checkbox": "on",
                        "tag": [{"node_type": "PlainText", "value": "Term"}],
                        "children": [{"node_type": "Paragraph", "children": []}],
                    }
                ],
            }
        )
        assert isinstance(node, PlainList)
        assert node.list_type == "descriptive"
        item = node.children[0]
        assert isinstance(item, ListItem)
        assert item.checkbox == "on"
        assert item.tag == [PlainText("Term")]

    def test_missing_optional_fields_take_defaults(self) -> None:
        """Only required fields need to be present."""
        node = dict_to_ast({"node_type": "Link", "link_type": "http", "path": "x.org"})
        assert node == Link("http", "x.org")

    def test_unknown_type_strict(self) -> None:
        """Unknown node types are errors in strict mode."""
        with pytest.raises(ParsingError) as exc_info:
            dict_to_ast({"node_type": "Drawer"})
        assert exc_info.value.node_type == "Drawer"

    def test_unknown_type_lenient(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown node types become empty text in lenient mode."""
        node = dict_to_ast({"node_type": "Drawer"}, strict_mode=False)
        assert node == PlainText("")
        assert "Unknown node type" in caplog.text

    def test_unknown_field_strict(self) -> None:
        """Unknown fields are errors in strict mode."""
        with pytest.raises(ParsingError):
            dict_to_ast({"node_type": "PlainText", "value": "x", "colour": "red"})

    def test_unknown_field_lenient(self) -> None:
        """Unknown fields are dropped in lenient mode."""
        node = dict_to_ast({"node_type": "PlainText", "value": "x", "colour": "red"}, strict_mode=False)
        assert node == PlainText("x")

    def test_missing_required_field(self) -> None:
        """Constructor errors are reported as parsing errors."""
        with pytest.raises(ParsingError) as exc_info:
            dict_to_ast({"node_type": "PlainText"})
        assert isinstance(exc_info.value.original_error, TypeError)

    def test_children_must_be_list(self) -> None:
        """Node list fields must hold lists."""
        with pytest.raises(ParsingError):
            dict_to_ast({"node_type": "Paragraph", "children": "text"})

    def test_non_object(self) -> None:
        """Only objects describe nodes."""
        with pytest.raises(ParsingError):
            dict_to_ast(["PlainText"])  # type: ignore[arg-type]


@pytest.mark.unit
class TestJson:
    """Tests for the JSON entry points."""

    def test_schema_version_is_written_first(self) -> None:
        """Serialized documents carry the schema version."""
        data = json.loads(ast_to_json(Document()))
        assert list(data)[:2] == ["schema_version", "node_type"]
        assert data["schema_version"] == SCHEMA_VERSION

    def test_non_ascii_is_kept(self) -> None:
        """Text is written as UTF-8, not escaped."""
        assert "Grüße" in ast_to_json(PlainText("Grüße"))

    def test_round_trip_document(self, sample_document) -> None:
        """A serialized document loads back equal to the original."""
        assert json_to_ast(ast_to_json(sample_document, indent=2)) == sample_document

    def test_round_trip_table_and_footnote(self) -> None:
        """Rows, cells and inline footnotes survive serialization."""
        doc = Document(
            children=[
                Table(
                    name="t",
                    caption=[PlainText("cap")],
                    children=[TableRow(children=[TableCell(children=[PlainText("a")])]), TableRow(row_type="rule")],
                ),
                Paragraph(children=[FootnoteReference(children=[PlainText("inline")])]),
            ]
        )
        assert json_to_ast(ast_to_json(doc)) == doc

    def test_missing_schema_version_defaults(self) -> None:
        """Documents without a schema version are read as the current one."""
        assert json_to_ast('{"node_type": "Document", "children": []}') == Document()

    def test_unsupported_schema_version(self) -> None:
        """Other schema versions are rejected."""
        with pytest.raises(ParsingError, match="schema version"):
            json_to_ast('{"schema_version": 99, "node_type": "Document"}')

    def test_malformed_json(self) -> None:
        """Syntax errors are parsing errors."""
        with pytest.raises(ParsingError) as exc_info:
            json_to_ast("{not json")
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_top_level_must_be_object(self) -> None:
        """Arrays are not documents."""
        with pytest.raises(ParsingError):
            json_to_ast("[]")
