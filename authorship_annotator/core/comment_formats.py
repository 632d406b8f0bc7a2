"""Comment syntax recognition and @@author parameter extraction.

WHY: An @@author tag only counts when it is the whole content of a comment
line. A tag quoted inside a string literal or trailing real code must stay
ordinary content. Five comment syntaxes cover the languages the annotator
supports; each needs its own full-line pattern and its own idea of where
the tag parameters end.

HOW: COMMENT_FORMATS is a fixed, ordered tuple of CommentFormat variants.
Each compiles to an anchored regex:

    ^\\s*START\\s*@@author(\\s+\\S+)*\\s*(END)?\\s*$

check_valid_comment_line() returns the index of the first variant whose
pattern matches. extract_author_parameters() cuts out the text between
the tag marker and the variant's end marker.

RULES:
- Priority order: //, /* */, #, <!-- -->, %
- End markers are tolerated, never required
- Matching is anchored to the whole line, not a substring search
- No match → NO_MATCH (-1); the line is treated as ordinary content
- Only ASCII whitespace separates the comment start, marker and tokens
- An empty parameter section is reported as None (the close-tag signal)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from authorship_annotator.config import AUTHOR_TAG

NO_MATCH = -1
"""Returned by check_valid_comment_line when no comment format matches."""

# Body of a tag: the marker followed by any number of whitespace-separated tokens.
_AUTHOR_TAG_BODY = re.escape(AUTHOR_TAG) + r"(\s+\S+)*"

# End marker for formats that run to end of line.
_WHITESPACE_END = r"\s"


@dataclass(frozen=True)
class CommentFormat:
    """One supported comment syntax.

    RULES:
    - start / end are regex fragments
    - end == _WHITESPACE_END means the comment runs to end of line
    - pattern is compiled once, at construction, in ASCII mode
    """

    name: str
    start: str
    end: str
    pattern: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regex = r"^\s*{start}\s*{body}\s*({end})?\s*$".format(
            start=self.start, body=_AUTHOR_TAG_BODY, end=self.end,
        )
        object.__setattr__(self, "pattern", re.compile(regex, re.ASCII))

    @property
    def has_end_marker(self) -> bool:
        return self.end != _WHITESPACE_END


COMMENT_FORMATS: Tuple[CommentFormat, ...] = (
    CommentFormat("double_slash", r"//", _WHITESPACE_END),
    CommentFormat("slash_star", r"/\*", r"\*/"),
    CommentFormat("hash", r"#", _WHITESPACE_END),
    CommentFormat("html", r"<!--", r"-->"),
    CommentFormat("percent", r"%", _WHITESPACE_END),
)


def check_valid_comment_line(line: str) -> int:
    """Return the index of the first comment format the whole line matches.

    Returns NO_MATCH when the line is not a well-formed @@author comment.
    """
    for index, comment_format in enumerate(COMMENT_FORMATS):
        if comment_format.pattern.match(line):
            return index
    return NO_MATCH


def extract_author_parameters(line: str, format_index: int) -> Optional[str]:
    """Extract the parameter text that follows the @@author marker.

    WHY: The parameters (author names and weights) sit between the tag
    marker and the comment's closing delimiter; the delimiter must never
    leak into an author name.

    HOW: Split once on the literal tag marker and trim what follows. For
    formats with an explicit end marker, split again on that marker and
    keep the first segment.

    RULES:
    - No text after the marker → None
    - Parameters never extend past the comment's end marker
    - Whitespace-only parameters → None (bare tag, i.e. a close tag)

    Args:
        line: Raw line content.
        format_index: Index into COMMENT_FORMATS, from check_valid_comment_line.

    Returns:
        The trimmed parameter string, or None for a bare tag.
    """
    pieces = line.split(AUTHOR_TAG, 1)
    if len(pieces) < 2:
        return None

    parameters = pieces[1].strip()
    comment_format = COMMENT_FORMATS[format_index]
    if comment_format.has_end_marker:
        segments = re.split(comment_format.end, parameters, flags=re.ASCII)
        parameters = segments[0].strip()

    return parameters or None
