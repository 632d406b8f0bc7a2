"""Intermediate representation dataclasses for annotated source files.

WHY: Blame gives one author per line; @@author annotations override that
for whole ranges of lines. Scanners, formatters and the HTTP API all need
the same view of a file split into unclaimed lines and authorship blocks.
The IR provides that single, well-typed form.

HOW: Five dataclasses form a hierarchy:
  Author          : a canonical author identity with ignore globs
  LineInfo        : one source line with its 1-indexed line number
  TextBlock       : a closed range of lines with a contribution map
  FileInfo        : a file's unclaimed lines plus its blocks
  AnnotationResult: what one scan claimed, dropped and registered

RULES:
- Authors compare and hash by git_id only
- UNKNOWN_AUTHOR is the single sentinel for unresolvable attribution
- Line numbers are 1-indexed and unique within a file
- After a scan every original line is unclaimed or in exactly one block,
  except the lines of a trailing unterminated block (see AnnotationResult)
- A TextBlock is never altered once the scanner has closed it
"""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Dict, List, Optional

from authorship_annotator.config import UNKNOWN_AUTHOR_GIT_ID


@dataclass(eq=False)
class Author:
    """A canonical author identity.

    WHY: Annotations name authors by git id, display name or alias. They
    all have to collapse onto one identity so that contribution maps
    aggregate correctly across files.

    HOW: Identity is the git_id. display_name defaults to the git id.
    ignore_glob_list holds glob patterns of files the author must never be
    credited for.

    RULES:
    - __eq__ and __hash__ use git_id only
    - ignore globs match against the POSIX form of the file path
    - "**" in a glob matches any number of directories
    """

    git_id: str
    display_name: str = ""
    aliases: List[str] = field(default_factory=list)
    ignore_glob_list: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.git_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self.git_id == other.git_id

    def __hash__(self) -> int:
        return hash(self.git_id)

    def is_ignoring_file(self, file_path: str | PurePath) -> bool:
        """Return True if any ignore glob matches ``file_path``."""
        posix_path = PurePath(file_path).as_posix()
        for glob in self.ignore_glob_list:
            pattern = glob.strip().replace("\\", "/")
            if not pattern:
                continue
            if fnmatch.fnmatchcase(posix_path, pattern):
                return True
            # "**/" also matches zero directories
            if pattern.startswith("**/") and fnmatch.fnmatchcase(posix_path, pattern[3:]):
                return True
        return False


UNKNOWN_AUTHOR = Author(git_id=UNKNOWN_AUTHOR_GIT_ID, display_name="Unknown Author")
"""Sentinel author for names that cannot be resolved and malformed tags."""


@dataclass(frozen=True)
class LineInfo:
    """One line of a source file.

    RULES:
    - line_number: 1-indexed position in the file
    - content: raw text without the trailing newline
    - author: blame author, if the caller materialized one; the scanner
      carries it through untouched
    """

    line_number: int
    content: str
    author: Optional[Author] = None


@dataclass
class TextBlock:
    """A contiguous range of lines whose authorship is declared by annotation.

    WHY: An @@author open tag and its matching close tag delimit lines that
    belong to the named authors regardless of blame.

    HOW: The scanner creates a block on the open tag, appends every line up
    to and including the close tag, then sets end_line_number.

    RULES:
    - start_line_number / end_line_number: inclusive range
    - lines: members in file order, including both tag lines
    - contribution_map: author → weight, insertion ordered, never empty
    """

    start_line_number: int
    end_line_number: int = -1
    lines: List[LineInfo] = field(default_factory=list)
    contribution_map: Dict[Author, int] = field(default_factory=dict)

    def add_line(self, line: LineInfo) -> None:
        self.lines.append(line)

    def is_closed(self) -> bool:
        return self.end_line_number >= self.start_line_number


@dataclass
class FileInfo:
    """A source file split into unclaimed lines and authorship blocks.

    WHY: Downstream attribution credits unclaimed lines by blame and block
    lines by their contribution map. Both views live on the same record.

    RULES:
    - path: file path relative to the repository root, POSIX separators
    - lines: lines not claimed by any block, in file order
    - blocks: closed TextBlocks in the order the scanner closed them
    """

    path: str
    lines: List[LineInfo] = field(default_factory=list)
    blocks: List[TextBlock] = field(default_factory=list)

    def remove_lines(self, to_remove: List[LineInfo]) -> None:
        """Drop the given lines from the unclaimed sequence."""
        removed = {line.line_number for line in to_remove}
        self.lines = [line for line in self.lines if line.line_number not in removed]

    def add_blocks(self, blocks: List[TextBlock]) -> None:
        self.blocks.extend(blocks)


@dataclass
class AnnotationResult:
    """Summary of one annotation scan over a FileInfo.

    WHY: An unterminated block silently removes lines from both the
    unclaimed sequence and the block collection. Callers need that loss,
    and any authors registered as a side effect, reported explicitly.

    RULES:
    - blocks: the closed blocks added to the FileInfo by this scan
    - unterminated_block: the block still open at end of input, or None
    - dropped_lines: lines of the unterminated block (claimed by nobody)
    - ignored_tag_lines: close tags seen while no block was open
    - registered_authors: authors auto-registered during this scan
    """

    blocks: List[TextBlock] = field(default_factory=list)
    unterminated_block: Optional[TextBlock] = None
    dropped_lines: List[LineInfo] = field(default_factory=list)
    ignored_tag_lines: List[LineInfo] = field(default_factory=list)
    registered_authors: List[Author] = field(default_factory=list)

    @property
    def claimed_line_count(self) -> int:
        return sum(len(block.lines) for block in self.blocks)

    @property
    def line_count_discrepancy(self) -> int:
        """Number of input lines that ended up in neither lines nor blocks."""
        return len(self.dropped_lines)
