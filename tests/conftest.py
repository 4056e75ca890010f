"""Pytest configuration and shared fixtures for the org2wiki test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from org2wiki.ast import (
    Document,
    FootnoteDefinition,
    FootnoteReference,
    Headline,
    Paragraph,
    PlainList,
    ListItem,
    PlainText,
    Table,
    TableCell,
    TableRow,
)

# Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding JSON document fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def sample_document() -> Document:
    """A small document touching headlines, lists, tables and footnotes."""
    return Document(
        children=[
            Headline(
                level=1,
                title=[PlainText("Intro")],
                children=[
                    Paragraph(children=[PlainText("See note"), FootnoteReference(label="1")]),
                    PlainList(
                        list_type="unordered",
                        children=[
                            ListItem(children=[Paragraph(children=[PlainText("first")])]),
                            ListItem(children=[Paragraph(children=[PlainText("second")])]),
                        ],
                    ),
                    Table(
                        children=[
                            TableRow(
                                children=[
                                    TableCell(children=[PlainText("a")]),
                                    TableCell(children=[PlainText("b")]),
                                ]
                            )
                        ]
                    ),
                ],
            ),
            Headline(
                level=1,
                title=[PlainText("Footnotes")],
                footnote_section=True,
                children=[FootnoteDefinition(label="1", children=[Paragraph(children=[PlainText("The note.")])])],
            ),
        ]
    )
