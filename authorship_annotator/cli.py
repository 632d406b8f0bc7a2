"""Command-line interface for the Authorship Annotator.

WHY: Authors want to check how their @@author tags will be read before
the attribution report runs. The CLI wires together loading, scanning and
formatting behind a single command.

HOW: Uses argparse to accept a source file, an optional repository root
and author config, the report formats and an output directory. Reports go
to stdout unless --output-dir is given, in which case each report is saved
as {filename}{suffix}. Status messages go to stderr.

RULES:
- Positional argument: source file path
- --author-config defaults to ANNOTATOR_AUTHOR_CONFIG; none means every
  annotated name is auto-registered
- --formats: comma-separated formatter keys (default: ANNOTATOR_DEFAULT_FORMATS)
- Output naming: {filename}{suffix}, numeric suffix for conflicts
  (-authorship-2.json)
- Status output goes to stderr (not stdout)
- Exit code 1 on configuration or input errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from authorship_annotator.config import AUTHOR_CONFIG_PATH, DEFAULT_FORMATS, LOG_LEVEL
from authorship_annotator.core.annotator import aggregate_annotation_authors
from authorship_annotator.core.source import load_author_config, load_file_info
from authorship_annotator.formatters import FORMATTERS, parse_format_keys
from authorship_annotator.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _resolve_output_path(name: str, suffix: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {name}{suffix} (e.g. Main.java-authorship.json)
    - Conflict: insert a counter before the extension
      (e.g. Main.java-authorship-2.json), starting at 2
    """
    base_path = output_dir / "{}{}".format(name, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(name, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, name: str, output_dir: Path) -> Path:
    path = _resolve_output_path(name, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def run(args: argparse.Namespace) -> int:
    """Scan one file and emit its reports. Returns the process exit code."""
    try:
        format_keys = parse_format_keys(args.formats)
        author_table = load_author_config(args.author_config)
        file_info = load_file_info(args.input_file, root=args.root)
    except (ValueError, FileNotFoundError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    total_lines = len(file_info.lines)
    result = aggregate_annotation_authors(file_info, author_table)
    _status("Scanned {} ({} lines): {} block(s), {} line(s) claimed".format(
        file_info.path, total_lines, len(result.blocks), result.claimed_line_count,
    ))
    if result.dropped_lines:
        _status("Warning: unterminated @@author block dropped {} line(s)".format(
            result.line_count_discrepancy,
        ))

    outputs: List[FormatterOutput] = []
    for key in format_keys:
        outputs.extend(FORMATTERS[key]().format(file_info, result))

    if args.output_dir is None:
        for output in outputs:
            sys.stdout.write(output.content)
        return 0

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    name = Path(args.input_file).name
    for output in outputs:
        saved = _save_output(output, name, output_dir)
        _status("  {}".format(saved))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect the
    parser without scanning anything.
    """
    parser = argparse.ArgumentParser(
        prog="authorship_annotator",
        description="Read @@author annotations from a source file and report "
                    "the authorship blocks they declare.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the source file to scan.",
    )

    parser.add_argument(
        "--root",
        default=None,
        help="Repository root; the reported path is relative to it.",
    )

    parser.add_argument(
        "--author-config",
        default=AUTHOR_CONFIG_PATH or None,
        help="JSON author roster. Without it, annotated names are "
             "registered as new authors (default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of report formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save reports to (default: print to stdout).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m authorship_annotator``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
