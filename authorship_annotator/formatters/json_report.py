"""JSON authorship report formatter.

WHY: Aggregation and dashboard tools consume the annotation results
programmatically. A stable, schema-checked JSON document lets them rely on
field names and types without reading this package's IR.

HOW: build_report() flattens the FileInfo and AnnotationResult into plain
dicts and lists. The formatter serializes it and validates the document
with jsonschema against REPORT_SCHEMA before returning.

RULES:
- blocks appear in the order they closed
- contributions list authors in the order the tag named them
- line lists hold 1-indexed line numbers
- Output suffix: "-authorship.json"
- Validate output against the schema before returning; raise on failure
"""

from __future__ import annotations

import json
from typing import Any

import jsonschema

from authorship_annotator.core.ir import AnnotationResult, FileInfo, TextBlock
from authorship_annotator.formatters.base import BaseFormatter, FormatterOutput

_LINE_NUMBERS = {"type": "array", "items": {"type": "integer", "minimum": 1}}

REPORT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "path", "blocks", "unclaimed_lines", "dropped_lines",
        "ignored_tag_lines", "registered_authors",
    ],
    "additionalProperties": False,
    "properties": {
        "path": {"type": "string"},
        "blocks": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["start_line", "end_line", "line_count", "contributions"],
                "additionalProperties": False,
                "properties": {
                    "start_line": {"type": "integer", "minimum": 1},
                    "end_line": {"type": "integer", "minimum": 1},
                    "line_count": {"type": "integer", "minimum": 1},
                    "contributions": {
                        "type": "array",
                        "minItems": 1,
                        "items": {
                            "type": "object",
                            "required": ["author", "display_name", "weight"],
                            "additionalProperties": False,
                            "properties": {
                                "author": {"type": "string", "minLength": 1},
                                "display_name": {"type": "string"},
                                "weight": {"type": "integer", "minimum": 0},
                            },
                        },
                    },
                },
            },
        },
        "unclaimed_lines": _LINE_NUMBERS,
        "dropped_lines": _LINE_NUMBERS,
        "ignored_tag_lines": _LINE_NUMBERS,
        "registered_authors": {"type": "array", "items": {"type": "string"}},
    },
}


def _block_to_dict(block: TextBlock) -> dict[str, Any]:
    return {
        "start_line": block.start_line_number,
        "end_line": block.end_line_number,
        "line_count": len(block.lines),
        "contributions": [
            {"author": author.git_id, "display_name": author.display_name, "weight": weight}
            for author, weight in block.contribution_map.items()
        ],
    }


def build_report(file_info: FileInfo, result: AnnotationResult) -> dict[str, Any]:
    """Flatten a scanned file into the JSON report structure."""
    return {
        "path": file_info.path,
        "blocks": [_block_to_dict(block) for block in file_info.blocks],
        "unclaimed_lines": [line.line_number for line in file_info.lines],
        "dropped_lines": [line.line_number for line in result.dropped_lines],
        "ignored_tag_lines": [line.line_number for line in result.ignored_tag_lines],
        "registered_authors": [author.git_id for author in result.registered_authors],
    }


class JsonReportFormatter(BaseFormatter):
    """Formats a scanned file as a schema-validated JSON report."""

    @property
    def name(self) -> str:
        return "JSON report"

    def format(self, file_info: FileInfo, result: AnnotationResult) -> list[FormatterOutput]:
        """Produce the JSON report.

        Raises:
            jsonschema.ValidationError: If the generated report does not
                match REPORT_SCHEMA.
        """
        report = build_report(file_info, result)
        jsonschema.validate(instance=report, schema=REPORT_SCHEMA)
        return [FormatterOutput(
            suffix="-authorship.json",
            content=json.dumps(report, indent=2, ensure_ascii=False),
            media_type="application/json",
        )]
