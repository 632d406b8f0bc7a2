"""Authorship Annotator: manual @@author overrides for blame-based attribution.

WHY: Line-by-line blame attributes code to whoever committed it last, which
is wrong for copied, pair-programmed or reformatted code. Authors declare
the real ownership with ``@@author`` comment tags; this package turns those
tags into structured authorship blocks that supersede blame.

HOW: Three-stage pipeline: load (source file + author config), scan
(core annotation state machine), report (pluggable formatters). The core
is pure: it consumes an already-materialized FileInfo and an author table
and never touches the filesystem.

RULES:
- All formatters consume the same FileInfo + AnnotationResult
- The core never imports from the CLI, server or formatters
- Scanning never raises on malformed annotations; it falls back
"""

__version__ = "0.1.0"
