"""Unit tests for link path helpers."""

import pytest

from org2wiki.renderers.links import file_uri, format_ordinal, normalize_image_path, rewrite_source_extension


@pytest.mark.unit
class TestRewriteSourceExtension:
    """Tests for rewrite_source_extension."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("notes.org", "notes.wiki"),
            ("dir/Plan.ORG", "dir/Plan.wiki"),
            ("image.png", "image.png"),
            ("notes.org.bak", "notes.org.bak"),
            ("organize", "organize"),
        ],
    )
    def test_rewrite(self, path: str, expected: str) -> None:
        """Only a trailing source extension is replaced, ignoring case."""
        assert rewrite_source_extension(path, ".wiki") == expected

    def test_custom_extension(self) -> None:
        """The target extension is configurable."""
        assert rewrite_source_extension("a.org", ".txt") == "a.txt"


@pytest.mark.unit
class TestPaths:
    """Tests for file_uri and normalize_image_path."""

    def test_absolute_file_uri(self) -> None:
        """Absolute paths are normalized and prefixed."""
        assert file_uri("/tmp/../docs/a.wiki") == "file:///docs/a.wiki"

    def test_relative_file_path_unchanged(self) -> None:
        """Relative paths stay as written."""
        assert file_uri("../a.wiki") == "../a.wiki"

    def test_image_paths(self) -> None:
        """Only absolute image paths are normalized."""
        assert normalize_image_path("/a/./b/../c.png") == "/a/c.png"
        assert normalize_image_path("./img/c.png") == "./img/c.png"


@pytest.mark.unit
class TestFormatOrdinal:
    """Tests for format_ordinal."""

    @pytest.mark.parametrize(
        "ordinal, expected",
        [
            (3, "3"),
            ([2], "2"),
            ([2, 1, 4], "2.1.4"),
            ([], None),
            (None, None),
        ],
    )
    def test_format(self, ordinal, expected) -> None:
        """Integers print as-is and section numbers are dotted."""
        assert format_ordinal(ordinal) == expected
