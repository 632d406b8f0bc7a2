"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: ScanRequest carries the file text and an optional author roster;
ScanResponse mirrors the JSON report produced by formatters.json_report,
plus any rendered reports the client asked for.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- A present ``authors`` roster (even empty) means "author config supplied"
- ScanResponse field names match formatters.json_report.build_report()
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from authorship_annotator.core.source import AuthorEntry


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ScanRequest(BaseModel):
    """A single file to scan."""

    path: str = Field(
        description="File path relative to the repository root; matched against ignore globs.",
        min_length=1,
    )
    content: str = Field(description="Full file text. Lines are split on newlines.")
    authors: Optional[List[AuthorEntry]] = Field(
        default=None,
        description="Author roster. When omitted, annotated names are registered as new authors; "
                    "when given, names outside it resolve to the unknown author.",
    )
    formats: List[str] = Field(
        default_factory=list,
        description="Report formats to render in addition to the structured result.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "path": "src/Main.java",
                "content": "// @@author jane 50\nint x = 1;\n// @@author\n",
                "authors": [{"gitId": "jane", "displayName": "Jane Doe"}],
                "formats": ["plain_text"],
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class Contribution(BaseModel):
    author: str = Field(description="Canonical git id ('-' for the unknown author).")
    display_name: str = Field(description="Author display name.")
    weight: int = Field(description="Relative contribution weight within the block.")


class BlockReport(BaseModel):
    start_line: int = Field(description="First line of the block (the open tag).")
    end_line: int = Field(description="Last line of the block, inclusive.")
    line_count: int = Field(description="Number of lines in the block.")
    contributions: List[Contribution] = Field(description="Declared authors and weights.")


class RenderedReport(BaseModel):
    format: str = Field(description="Formatter key.")
    suffix: str = Field(description="File suffix the report would be saved with.")
    media_type: str = Field(description="MIME type of the content.")
    content: str = Field(description="Rendered report.")


class ScanResponse(BaseModel):
    """Result of scanning one file."""

    path: str = Field(description="Scanned file path.")
    blocks: List[BlockReport] = Field(description="Closed authorship blocks, in closing order.")
    unclaimed_lines: List[int] = Field(description="Line numbers not claimed by any block.")
    dropped_lines: List[int] = Field(description="Lines of an unterminated block, claimed by nobody.")
    ignored_tag_lines: List[int] = Field(description="Close tags found while no block was open.")
    registered_authors: List[str] = Field(description="Authors auto-registered by this scan.")
    reports: List[RenderedReport] = Field(default_factory=list, description="Rendered reports.")


class FormatInfo(BaseModel):
    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
