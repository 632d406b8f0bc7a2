"""@@author block scanning: the annotation state machine.

WHY: Authors override blame by wrapping code in a pair of tags:

    // @@author jane 50
    ...code...
    // @@author

Everything from the opening tag to the closing tag (inclusive) belongs to
the named authors. This module finds those pairs and moves the lines they
enclose out of the file's unclaimed sequence into TextBlocks.

HOW: A single forward pass driven by an explicit two-state enum. Each line
that contains the tag marker is checked against the comment formats; a
well-formed tag line with parameters opens a block, a bare one closes it.
Lines inside an open block are appended to it. After the pass, absorbed
lines are removed from the FileInfo and closed blocks are appended.

RULES:
- OUTSIDE + open tag → open a block on this line
- OUTSIDE + close tag → inert; the line stays unclaimed
- INSIDE + ordinary line → append to the current block
- INSIDE + close tag → append, end the block on this line, close it
- INSIDE + open tag → close the current block on the previous line, then
  open a new block on this line
- End of input while INSIDE → the block is dropped together with its
  lines; they are reported in AnnotationResult.dropped_lines
- Tag text outside a valid comment envelope is ordinary content
- Scanning never raises for malformed annotations
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional

from authorship_annotator.config import AUTHOR_TAG
from authorship_annotator.core.authors import AuthorTable, resolve_contribution_map
from authorship_annotator.core.comment_formats import (
    NO_MATCH,
    check_valid_comment_line,
    extract_author_parameters,
)
from authorship_annotator.core.ir import AnnotationResult, FileInfo, LineInfo, TextBlock
from authorship_annotator.core.weights import parse_author_weights

logger = logging.getLogger(__name__)


class ScanState(str, enum.Enum):
    """Block builder states."""

    OUTSIDE_BLOCK = "outside_block"
    INSIDE_BLOCK = "inside_block"


def _close_block(block: TextBlock, end_line_number: int, closed: List[TextBlock]) -> None:
    block.end_line_number = end_line_number
    closed.append(block)
    logger.debug(
        "Closed block %d-%d for %s",
        block.start_line_number,
        block.end_line_number,
        ", ".join(author.git_id for author in block.contribution_map),
    )


def aggregate_annotation_authors(
    file_info: FileInfo,
    author_table: AuthorTable,
) -> AnnotationResult:
    """Override blame authorship in ``file_info`` using its @@author tags.

    WHY: This is the single entry point the drivers call per file. It
    mutates the FileInfo in place so downstream attribution sees blocks
    instead of the lines they claimed.

    HOW: Walks file_info.lines once with an explicit ScanState, building
    TextBlocks as described in the module docstring, then removes every
    absorbed line and appends the closed blocks.

    RULES:
    - Only the author table may change as a side effect (registration)
    - Closed blocks are appended in the order they closed
    - Lines of an unterminated block end up in neither lines nor blocks

    Args:
        file_info: File to scan; its lines and blocks are updated in place.
        author_table: Author lookup used to resolve annotated names.

    Returns:
        AnnotationResult describing the blocks added, dropped lines,
        ignored close tags and authors registered during the scan.
    """
    result = AnnotationResult()
    state = ScanState.OUTSIDE_BLOCK
    current_block: Optional[TextBlock] = None

    for line in file_info.lines:
        content = line.content
        format_index = check_valid_comment_line(content) if AUTHOR_TAG in content else NO_MATCH

        if format_index == NO_MATCH:
            if state is ScanState.INSIDE_BLOCK:
                current_block.add_line(line)
            continue

        parameters = extract_author_parameters(content, format_index)

        if parameters is None:
            # Close tag
            if state is ScanState.INSIDE_BLOCK:
                current_block.add_line(line)
                _close_block(current_block, line.line_number, result.blocks)
                current_block = None
                state = ScanState.OUTSIDE_BLOCK
            else:
                # Never emitted into a block, but not dropped either: the line
                # stays in file_info.lines so every input line is still either
                # unclaimed or in a block.
                logger.debug("%s:%d: close tag without open block", file_info.path, line.line_number)
                result.ignored_tag_lines.append(line)
            continue

        contribution_map = resolve_contribution_map(
            parse_author_weights(parameters),
            author_table,
            file_info.path,
            registered=result.registered_authors,
        )

        if state is ScanState.INSIDE_BLOCK:
            _close_block(current_block, current_block.lines[-1].line_number, result.blocks)

        current_block = TextBlock(
            start_line_number=line.line_number,
            contribution_map=contribution_map,
        )
        current_block.add_line(line)
        state = ScanState.INSIDE_BLOCK

    if state is ScanState.INSIDE_BLOCK:
        result.unterminated_block = current_block
        result.dropped_lines = list(current_block.lines)
        logger.warning(
            "%s: @@author block opened on line %d is never closed; dropping %d line(s)",
            file_info.path,
            current_block.start_line_number,
            len(current_block.lines),
        )

    absorbed: List[LineInfo] = [line for block in result.blocks for line in block.lines]
    absorbed.extend(result.dropped_lines)

    file_info.remove_lines(absorbed)
    file_info.add_blocks(result.blocks)
    return result
