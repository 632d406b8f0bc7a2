"""Plain text authorship summary formatter.

WHY: Reviewers want a quick, readable answer to "who declared which lines"
without opening JSON. This is the default CLI output.

HOW: One paragraph per closed block: a "Lines A-B:" header followed by
one "  author (display name): weight" row per contributor. A footer gives
the unclaimed line count, then warnings for dropped lines and ignored
close tags when there are any.

RULES:
- Blocks in the order they closed
- Display name shown only when it differs from the git id
- Double newline between paragraphs
- No trailing whitespace on any line
- Output suffix: "-authorship.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from authorship_annotator.core.ir import AnnotationResult, Author, FileInfo, LineInfo, TextBlock
from authorship_annotator.formatters.base import BaseFormatter, FormatterOutput


def _author_label(author: Author) -> str:
    if author.display_name and author.display_name != author.git_id:
        return "{} ({})".format(author.git_id, author.display_name)
    return author.git_id


def _format_block(block: TextBlock) -> str:
    rows = ["Lines {}-{}:".format(block.start_line_number, block.end_line_number)]
    for author, weight in block.contribution_map.items():
        rows.append("  {}: {}".format(_author_label(author), weight))
    return "\n".join(rows)


def _format_line_numbers(lines: List[LineInfo]) -> str:
    return ", ".join(str(line.line_number) for line in lines)


class PlainTextFormatter(BaseFormatter):
    """Formats a scanned file as a readable authorship summary."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, file_info: FileInfo, result: AnnotationResult) -> list[FormatterOutput]:
        paragraphs: List[str] = ["{}: {} annotated block(s)".format(file_info.path, len(file_info.blocks))]
        paragraphs.extend(_format_block(block) for block in file_info.blocks)

        footer = ["Unclaimed lines: {}".format(len(file_info.lines))]
        if result.dropped_lines:
            footer.append("Dropped (unterminated block): {}".format(_format_line_numbers(result.dropped_lines)))
        if result.ignored_tag_lines:
            footer.append("Ignored close tags: {}".format(_format_line_numbers(result.ignored_tag_lines)))
        if result.registered_authors:
            footer.append("Registered authors: {}".format(
                ", ".join(author.git_id for author in result.registered_authors)
            ))
        paragraphs.append("\n".join(footer))

        return [FormatterOutput(
            suffix="-authorship.txt",
            content="\n\n".join(paragraphs) + "\n",
            media_type="text/plain",
        )]
