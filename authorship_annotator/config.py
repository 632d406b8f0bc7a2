"""Configuration constants and .env loading.

WHY: Centralizes the values that shape annotation scanning (default
weight, unknown-author identity) and the driver defaults (author config
location, report formats, log level) so they are easy to find and
override without touching logic.

HOW: python-dotenv loads the .env file on import. Scanner constants are
plain module-level values; driver defaults read from environment
variables with sensible fallbacks.

RULES:
- DEFAULT_AUTHOR_WEIGHT applies when a tag names an author without a weight
- UNKNOWN_AUTHOR_WEIGHT is the weight given to the unknown-author fallback
- ANNOTATOR_AUTHOR_CONFIG points at the JSON author roster (empty = none)
- All driver defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Annotation scanning
# ---------------------------------------------------------------------------

AUTHOR_TAG = "@@author"
"""Literal marker that introduces an authorship annotation."""

DEFAULT_AUTHOR_WEIGHT = 100
"""Weight given to a named author when the tag omits one."""

UNKNOWN_AUTHOR_GIT_ID = "-"
"""Git id of the sentinel author that receives unresolvable attributions."""

UNKNOWN_AUTHOR_WEIGHT = 1
"""Weight of the unknown-author fallback entry."""

# ---------------------------------------------------------------------------
# Driver defaults (CLI and HTTP API)
# ---------------------------------------------------------------------------

AUTHOR_CONFIG_PATH = os.getenv("ANNOTATOR_AUTHOR_CONFIG", "").strip()
DEFAULT_FORMATS = os.getenv("ANNOTATOR_DEFAULT_FORMATS", "plain_text").strip()
LOG_LEVEL = os.getenv("ANNOTATOR_LOG_LEVEL", "WARNING").upper()
