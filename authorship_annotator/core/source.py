"""Loaders for source files and the JSON author roster.

WHY: The scanner consumes an already-materialized FileInfo and an author
table. The CLI and tests need a way to build both from files on disk.

HOW: load_file_info() reads a UTF-8 file into 1-indexed LineInfo records.
load_author_config() parses the JSON roster through pydantic models and
returns an AuthorConfiguration flagged as "config file present". With no
path, an empty table without a config file is returned, so every
annotated name is auto-registered.

RULES:
- File paths are stored relative to ``root`` when given, POSIX separators
- Line content carries no trailing newline
- Lines end at \\n, \\r\\n or \\r only
- Roster format: {"authors": [{"gitId", "displayName", "aliases",
  "ignoreGlobList"}]}; only gitId is required
- Malformed rosters raise ValueError naming the file
- Missing files raise FileNotFoundError
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from authorship_annotator.core.authors import AuthorConfiguration
from authorship_annotator.core.ir import Author, FileInfo, LineInfo

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class AuthorEntry(BaseModel):
    """One author in the JSON roster."""

    model_config = ConfigDict(populate_by_name=True)

    git_id: str = Field(alias="gitId", min_length=1)
    display_name: str = Field(default="", alias="displayName")
    aliases: List[str] = Field(default_factory=list)
    ignore_glob_list: List[str] = Field(default_factory=list, alias="ignoreGlobList")

    def to_author(self) -> Author:
        return Author(
            git_id=self.git_id,
            display_name=self.display_name,
            aliases=list(self.aliases),
            ignore_glob_list=list(self.ignore_glob_list),
        )


class AuthorConfigFile(BaseModel):
    """Top-level JSON roster."""

    authors: List[AuthorEntry] = Field(default_factory=list)


def build_author_configuration(
    entries: Optional[List[AuthorEntry]],
) -> AuthorConfiguration:
    """Build an author table; ``entries=None`` means no roster was supplied."""
    if entries is None:
        return AuthorConfiguration(has_config_file=False)
    return AuthorConfiguration(
        authors=[entry.to_author() for entry in entries],
        has_config_file=True,
    )


def load_author_config(path: Optional[str | Path] = None) -> AuthorConfiguration:
    """Load the author table from a JSON roster, or an empty one without it.

    Args:
        path: Path to the roster file, or None/"" for no roster.

    Returns:
        AuthorConfiguration ready to pass to the scanner.

    Raises:
        FileNotFoundError: If ``path`` is given but does not exist.
        ValueError: If the file is not a valid roster.
    """
    if not path:
        return build_author_configuration(None)

    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError("Author config file not found: {}".format(config_path))

    try:
        roster = AuthorConfigFile.model_validate_json(config_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValueError("Invalid author config {}: {}".format(config_path.name, e)) from e

    return build_author_configuration(roster.authors)


def lines_from_text(text: str) -> List[LineInfo]:
    """Split text into 1-indexed LineInfo records.

    Only \\n, \\r\\n and a lone \\r end a line. Form feeds and Unicode line
    separators stay part of the line they appear in.
    """
    contents = _LINE_BREAK_RE.split(text)
    if contents[-1] == "":
        contents.pop()
    return [
        LineInfo(line_number=number, content=content)
        for number, content in enumerate(contents, start=1)
    ]


def load_file_info(path: str | Path, root: Optional[str | Path] = None) -> FileInfo:
    """Read a source file into a FileInfo with no blocks yet.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid UTF-8.
    """
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError("Source file not found: {}".format(source))

    try:
        text = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError("{} is not a UTF-8 text file".format(source.name)) from e

    display_path = source
    if root is not None:
        try:
            display_path = source.resolve().relative_to(Path(root).resolve())
        except ValueError:
            display_path = source

    return FileInfo(path=display_path.as_posix(), lines=lines_from_text(text))
