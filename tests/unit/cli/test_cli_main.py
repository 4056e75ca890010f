"""Unit tests for the command-line interface."""

import io
import logging

import pytest

from org2wiki import __version__
from org2wiki.ast import ast_to_json
from org2wiki.cli import (
    CONFIG_ENV_VAR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    main,
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test in an empty directory and restore root logging afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def document_file(tmp_path, sample_document):
    """The sample document serialized to JSON."""
    path = tmp_path / "doc.json"
    path.write_text(ast_to_json(sample_document), encoding="utf-8")
    return path


@pytest.mark.unit
class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Unset rendering flags stay None so configuration files are not overridden."""
        args = create_parser().parse_args(["doc.json"])
        assert args.input == "doc.json"
        assert args.output is None
        assert args.headline_style is None
        assert args.with_tags is None
        assert args.default_table_class is None
        assert args.no_table_class is False
        assert args.log_level == "WARNING"

    def test_negative_flags(self) -> None:
        """--no-* flags store False."""
        args = create_parser().parse_args(["d", "--no-tags", "--no-todo-keywords", "--no-special-strings"])
        assert args.with_tags is False
        assert args.with_todo_keywords is False
        assert args.with_special_strings is False

    def test_table_class_flags_are_exclusive(self) -> None:
        """--table-class and --no-table-class cannot be combined."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["d", "--table-class", "x", "--no-table-class"])

    def test_invalid_headline_style(self) -> None:
        """Only supported headline styles are accepted on the command line."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["d", "--headline-style", "fancy"])

    def test_version(self, capsys) -> None:
        """--version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


@pytest.mark.unit
class TestMain:
    """Tests for main."""

    def test_render_to_stdout(self, document_file, capsys) -> None:
        """The rendered document is written to stdout."""
        assert main([str(document_file)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith("= Intro =\nSee note<sup>1</sup>\n")
        assert out.endswith("== Footnotes ==\n[1] The note.\n")

    def test_render_to_file(self, document_file, tmp_path) -> None:
        """-o writes the output file."""
        target = tmp_path / "out.wiki"
        assert main([str(document_file), "-o", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8").startswith("= Intro =\n")

    def test_read_from_stdin(self, document_file, monkeypatch, capsys) -> None:
        """'-' reads the tree from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO(document_file.read_text(encoding="utf-8")))
        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("= Intro =")

    def test_flags_change_rendering(self, document_file, capsys) -> None:
        """Command-line flags reach the renderer."""
        assert main([str(document_file), "--headline-style", "setext", "--no-table-class"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith("Intro\n=====\n\n")
        assert "{| \n" in out

    def test_config_file(self, document_file, tmp_path, capsys) -> None:
        """A discovered configuration file applies."""
        (tmp_path / ".org2wiki.toml").write_text('default_table_class = "sortable"\n', encoding="utf-8")
        assert main([str(document_file)]) == EXIT_SUCCESS
        assert "{| class=sortable\n" in capsys.readouterr().out

    def test_flags_override_config(self, document_file, tmp_path, capsys) -> None:
        """Flags win over configuration values."""
        config = tmp_path / "cfg.yaml"
        config.write_text("default_table_class: sortable\n", encoding="utf-8")
        assert main([str(document_file), "--config", str(config), "--table-class", "plain"]) == EXIT_SUCCESS
        assert "{| class=plain\n" in capsys.readouterr().out

    def test_config_from_environment(self, document_file, tmp_path, monkeypatch, capsys) -> None:
        """The environment variable names a configuration file."""
        config = tmp_path / "env.json"
        config.write_text('{"language": "fr"}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert main([str(document_file)]) == EXIT_SUCCESS
        assert "== Notes de bas de page ==" in capsys.readouterr().out

    def test_invalid_config(self, document_file, tmp_path, capsys) -> None:
        """Unknown configuration keys exit with the validation code."""
        config = tmp_path / "bad.json"
        config.write_text('{"colour": "red"}', encoding="utf-8")
        assert main([str(document_file), "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "colour" in capsys.readouterr().err

    def test_missing_config(self, document_file, capsys) -> None:
        """A missing configuration file exits with the validation code."""
        assert main([str(document_file), "--config", "missing.toml"]) == EXIT_VALIDATION_ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_missing_input(self, capsys) -> None:
        """A missing input file is an error."""
        assert main(["missing.json"]) == EXIT_ERROR
        assert "cannot load missing.json" in capsys.readouterr().err

    def test_invalid_input(self, tmp_path, capsys) -> None:
        """A tree that is not a document is an error."""
        path = tmp_path / "text.json"
        path.write_text('{"node_type": "PlainText", "value": "x"}', encoding="utf-8")
        assert main([str(path)]) == EXIT_ERROR
        assert "Top-level node must be a Document" in capsys.readouterr().err

    def test_input_not_utf8(self, tmp_path, capsys) -> None:
        """Input that is not UTF-8 is an error, not a traceback."""
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe{}")
        assert main([str(path)]) == EXIT_ERROR
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_unwritable_output(self, document_file, tmp_path, capsys) -> None:
        """Write failures are errors."""
        target = tmp_path / "no" / "such" / "dir.wiki"
        assert main([str(document_file), "-o", str(target)]) == EXIT_ERROR
        assert "Could not write output" in capsys.readouterr().err
