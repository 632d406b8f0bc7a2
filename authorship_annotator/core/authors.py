"""Author resolution table and alias resolution for annotated names.

WHY: Annotations name authors by whatever string the writer typed: a git
id, a display name or an alias. Attribution needs one canonical Author per
person. When a project supplies an author roster, names outside it must
not invent new authors; without a roster, every annotated name becomes an
author of its own.

HOW: AuthorTable is the capability the scanner depends on: lookup,
insert and an "author config file present" query. AuthorConfiguration is
the in-memory implementation, indexing each author under its git id,
display name and aliases. resolve_contribution_map() turns parsed
(name, weight) pairs into an Author → weight mapping for one file.

RULES:
- Unknown name + no config file → register a new Author under that name
- Unknown name + config file → UNKNOWN_AUTHOR, nothing registered
- Authors ignoring the current file are excluded from the mapping
- Empty mapping → {UNKNOWN_AUTHOR: UNKNOWN_AUTHOR_WEIGHT}
- Registration is idempotent and serialized by a lock
- Authors are never removed or altered once added
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import Dict, Iterable, List, Optional, Tuple

from authorship_annotator.config import UNKNOWN_AUTHOR_WEIGHT
from authorship_annotator.core.ir import UNKNOWN_AUTHOR, Author

logger = logging.getLogger(__name__)


class AuthorTable(ABC):
    """Author lookup capability injected into the scanner.

    To plug in another author source:
    1. Subclass AuthorTable
    2. Implement get_author(), add_author() and has_author_config_file()
    3. Make add_author() return the existing Author when the name is taken
    """

    @abstractmethod
    def get_author(self, name: str) -> Optional[Author]:
        """Return the canonical Author for ``name``, or None if unknown."""

    @abstractmethod
    def add_author(self, author: Author) -> Author:
        """Register ``author`` and return the canonical Author for its git id."""

    @abstractmethod
    def has_author_config_file(self) -> bool:
        """True when an external author roster was supplied."""


class AuthorConfiguration(AuthorTable):
    """In-memory author table keyed by git id, display name and alias.

    WHY: Both the CLI and the HTTP API build their table from an optional
    JSON roster; tests build one directly. Several scans may share one
    table, so registration must not race.

    HOW: A dict maps every known name to its Author; a second dict holds
    canonical authors by git id. All reads and writes happen under a
    threading.Lock.

    RULES:
    - Git ids take precedence over display names and aliases; otherwise
      the first author to claim a name keeps it
    - add_author() on a taken git id returns the existing Author
    - A git id that shadows another author's alias is logged as a warning
    - authors lists each canonical Author once, in registration order
    """

    def __init__(
        self,
        authors: Optional[Iterable[Author]] = None,
        has_config_file: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._has_config_file = has_config_file
        self._authors: List[Author] = []
        self._by_git_id: Dict[str, Author] = {}
        self._author_map: Dict[str, Author] = {}
        for author in authors or []:
            self.add_author(author)

    @property
    def authors(self) -> List[Author]:
        with self._lock:
            return list(self._authors)

    def get_author(self, name: str) -> Optional[Author]:
        with self._lock:
            return self._author_map.get(name)

    def add_author(self, author: Author) -> Author:
        with self._lock:
            existing = self._by_git_id.get(author.git_id)
            if existing is not None:
                return existing

            shadowed = self._author_map.get(author.git_id)
            self._authors.append(author)
            self._by_git_id[author.git_id] = author
            self._author_map[author.git_id] = author
            for key in [author.display_name, *author.aliases]:
                if key and key not in self._author_map:
                    self._author_map[key] = author

        if shadowed is not None:
            logger.warning(
                "Git id %r of a new author was a display name or alias of %s; "
                "it now resolves to the new author",
                author.git_id,
                shadowed.git_id,
            )
        logger.debug("Registered author %s", author.git_id)
        return author

    def has_author_config_file(self) -> bool:
        return self._has_config_file


def resolve_author(name: str, author_table: AuthorTable) -> Tuple[Author, bool]:
    """Resolve one annotated name to an Author.

    Returns:
        (author, registered): registered is True when this call added a
        new Author to the table.
    """
    author = author_table.get_author(name)
    if author is not None:
        return author, False

    if author_table.has_author_config_file():
        logger.debug("Author %r not in author config; using unknown author", name)
        return UNKNOWN_AUTHOR, False

    candidate = Author(git_id=name)
    author = author_table.add_author(candidate)
    return author, author is candidate


def resolve_contribution_map(
    pairs: Iterable[Tuple[str, int]],
    author_table: AuthorTable,
    file_path: str | PurePath,
    registered: Optional[List[Author]] = None,
) -> Dict[Author, int]:
    """Build the Author → weight mapping for one opening tag.

    WHY: The parser yields raw names; blocks need canonical authors, minus
    anyone configured to ignore this file.

    HOW: Resolve each name in order, drop authors ignoring ``file_path``,
    and fall back to the unknown author when nothing is left.

    RULES:
    - A later entry for the same Author overwrites the earlier weight
    - Newly registered authors are appended to ``registered`` if given

    Args:
        pairs: (name, weight) pairs from parse_author_weights().
        author_table: Table used for lookup and registration.
        file_path: Path of the file being scanned, for ignore globs.
        registered: Optional list collecting authors added by this call.

    Returns:
        Non-empty Author → weight mapping.
    """
    contribution_map: Dict[Author, int] = {}
    for name, weight in pairs:
        author, is_new = resolve_author(name, author_table)
        if is_new and registered is not None and author not in registered:
            registered.append(author)

        if author.is_ignoring_file(file_path):
            logger.debug("Author %s ignores %s; excluded from block", author.git_id, file_path)
            continue

        contribution_map[author] = weight

    if not contribution_map:
        contribution_map[UNKNOWN_AUTHOR] = UNKNOWN_AUTHOR_WEIGHT

    return contribution_map
