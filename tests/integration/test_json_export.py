"""Integration tests: load a JSON tree from disk and export it."""

import pytest

from org2wiki import MediaWikiOptions, load_document, render
from org2wiki.ast import ast_to_json, json_to_ast
from org2wiki.exceptions import ParsingError

EXPECTED = (
    "= TODO Overview     :work: =\n"
    "The '''plan''' has two parts &ndash; see below<sup>1</sup>.\n"
    "\n"
    "# ☑ Collect data\n"
    "# Analyse\n"
    "#* `run.py`\n"
    "\n"
    "= Results =\n"
    "{| class=wikitable\n"
    "|+ Scores\n"
    "\n"
    "\n"
    "|-\n"
    "|run\n"
    "|score\n"
    "|-\n"
    "|-\n"
    "|a\n"
    "|0.9\n"
    "\n"
    "|}\n"
    "\n"
    "Table 1 extends the overview (See section 1); raw data at [//example.org/data example].\n"
    "\n"
    "    score = run()\n"
    "    print(score)\n"
    "\n"
    "== Footnotes ==\n"
    "[1] Because it is simpler.\n"
)


@pytest.fixture
def notes_path(fixtures_dir):
    return fixtures_dir / "project_notes.json"


@pytest.mark.integration
class TestJsonExport:
    """End-to-end export of a serialized document."""

    def test_full_export(self, notes_path) -> None:
        """The fixture document renders to the expected wiki text."""
        assert render(load_document(notes_path)) == EXPECTED

    def test_export_from_stream(self, notes_path) -> None:
        """Documents can be loaded from open text streams."""
        with open(notes_path, encoding="utf-8") as f:
            assert render(load_document(f)) == EXPECTED

    def test_export_is_repeatable(self, notes_path) -> None:
        """Rendering the same tree twice gives the same text."""
        document = load_document(notes_path)
        assert render(document) == render(document)

    def test_options_are_applied(self, notes_path) -> None:
        """Options change the whole export."""
        options = MediaWikiOptions(
            headline_style="setext",
            with_tags=False,
            with_todo_keywords=False,
            default_table_class=None,
            language="de",
        )
        output = render(load_document(notes_path), options)
        assert output.startswith("Overview\n========\n\n")
        assert "Results\n=======\n\n{| \n|+ Scores\n" in output
        assert "the overview (siehe Abschnitt 1)" in output
        assert output.endswith("== Fußnoten ==\n[1] Because it is simpler.\n")

    def test_serialized_tree_renders_identically(self, notes_path) -> None:
        """Writing the loaded tree back to JSON preserves its rendering."""
        document = load_document(notes_path)
        reloaded = json_to_ast(ast_to_json(document))
        assert render(reloaded) == EXPECTED

    def test_undecodable_file(self, tmp_path) -> None:
        """Bytes that are not UTF-8 raise a parsing error carrying the decode error."""
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(ParsingError) as exc_info:
            load_document(path)
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)
