"""Author/weight pair parsing for @@author tag parameters.

WHY: One tag may credit several authors with different weights, e.g.
``@@author bob 30 carol 70``. Author names follow the GitHub username
format so that tags written against a repository's contributor list
resolve cleanly.

HOW: A single regex finds all leftmost, non-overlapping groups of
``NAME WHITESPACE DIGITS*``. A trailing space is appended before matching
so that a name at the very end of the parameters (``@@author jane``) still
forms a group with an empty weight.

RULES:
- NAME: 1–39 alphanumerics or single inner hyphens, never leading/trailing
- Weight: the digit run after the whitespace; empty → DEFAULT_AUTHOR_WEIGHT
- Tokens that are not valid names are skipped, never an error
- A weight too long to convert to an int makes its group malformed; the
  group is skipped
- Whitespace and digits are ASCII only
- No valid group → empty list (the resolver falls back to unknown author)
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from authorship_annotator.config import DEFAULT_AUTHOR_WEIGHT

logger = logging.getLogger(__name__)

# GitHub username format followed by an optional weight.
AUTHOR_WEIGHT_PATTERN = re.compile(
    r"(?P<name>[a-zA-Z0-9](?:[a-zA-Z0-9]|-(?=[a-zA-Z0-9])){0,38})\s(?P<weight>\d*)",
    re.ASCII,
)


def parse_author_weights(parameters: str) -> List[Tuple[str, int]]:
    """Parse ``NAME [WEIGHT]`` groups from a tag's parameter string.

    Args:
        parameters: Trimmed text between the @@author marker and the end
                    of the comment.

    Returns:
        (name, weight) pairs in the order they appear. Empty when the
        parameters contain no valid group.
    """
    pairs: List[Tuple[str, int]] = []
    for match in AUTHOR_WEIGHT_PATTERN.finditer(parameters + " "):
        weight_text = match.group("weight")
        try:
            weight = int(weight_text) if weight_text else DEFAULT_AUTHOR_WEIGHT
        except ValueError:
            logger.debug("Skipping %r: weight has %d digits", match.group("name"), len(weight_text))
            continue
        pairs.append((match.group("name"), weight))
    return pairs
