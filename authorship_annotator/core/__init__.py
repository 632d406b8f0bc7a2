"""Core annotation scanning modules.

WHY: The core package is the stable heart of the annotator: the IR
dataclasses and the @@author state machine. Every driver (CLI, HTTP API,
formatters) builds on it.

HOW: ir.py defines the data structures, comment_formats.py recognizes
tag lines and extracts their parameters, weights.py parses author/weight
pairs, authors.py resolves names against the author table, annotator.py
drives the per-line scan. source.py loads files and author configs from
disk for the drivers.

RULES:
- IR dataclasses are the contract: change with care
- Scanning is I/O free; only source.py reads from disk
"""
