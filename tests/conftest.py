"""Shared test fixtures for the authorship_annotator test suite.

WHY: Most test modules need a FileInfo built from literal source lines and
an author table in one of its two modes (with or without a roster).
Centralizing them keeps every test reading like the file it scans.

HOW: make_file_info() turns a list of strings into 1-indexed LineInfos.
Fixtures provide a roster-backed table and an empty auto-registering one.

RULES:
- Line numbers start at 1, matching what the loaders produce
- The roster contains jane, bob and carol; carol ignores docs/**
"""

from typing import List

import pytest

from authorship_annotator.core.authors import AuthorConfiguration
from authorship_annotator.core.ir import Author, FileInfo, LineInfo


def make_file_info(lines: List[str], path: str = "src/Main.java") -> FileInfo:
    return FileInfo(
        path=path,
        lines=[LineInfo(line_number=i, content=text) for i, text in enumerate(lines, start=1)],
    )


ROSTER_JSON = """
{
  "authors": [
    {"gitId": "jane", "displayName": "Jane Doe", "aliases": ["jdoe"]},
    {"gitId": "bob"},
    {"gitId": "carol", "ignoreGlobList": ["docs/**"]}
  ]
}
"""


@pytest.fixture
def roster_authors():
    return [
        Author(git_id="jane", display_name="Jane Doe", aliases=["jdoe"]),
        Author(git_id="bob"),
        Author(git_id="carol", ignore_glob_list=["docs/**"]),
    ]


@pytest.fixture
def roster_table(roster_authors):
    """Author table loaded from a roster file: unknown names are not registered."""
    return AuthorConfiguration(authors=roster_authors, has_config_file=True)


@pytest.fixture
def open_table():
    """Author table without a roster file: unknown names are registered."""
    return AuthorConfiguration(has_config_file=False)


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "authors.json"
    path.write_text(ROSTER_JSON, encoding="utf-8")
    return path
