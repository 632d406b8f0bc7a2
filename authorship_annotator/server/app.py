"""FastAPI application exposing the annotation scanner.

WHY: Report pipelines and editor integrations that are not written in
Python need to check @@author annotations over HTTP without shelling out
to the CLI.

HOW: POST /scans accepts a file's text and an optional author roster,
runs the scanner on a fresh author table and returns the structured
result plus any requested rendered reports. GET /formats and GET /health
support discovery and liveness checks.

RULES:
- Each request gets its own author table; nothing is shared between requests
- Unknown format keys → 400 with an ErrorResponse body
- The scan itself never fails on malformed annotations
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from authorship_annotator import __version__
from authorship_annotator.core.annotator import aggregate_annotation_authors
from authorship_annotator.core.ir import FileInfo
from authorship_annotator.core.source import build_author_configuration, lines_from_text
from authorship_annotator.formatters import FORMATTERS
from authorship_annotator.formatters.json_report import build_report
from authorship_annotator.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    RenderedReport,
    ScanRequest,
    ScanResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Authorship Annotator API",
    description=(
        "Scan source text for @@author annotations and return the "
        "authorship blocks they declare."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.post(
    "/scans",
    response_model=ScanResponse,
    responses={400: {"model": ErrorResponse, "description": "Unknown report format."}},
    tags=["scans"],
    summary="Scan one file for @@author blocks",
)
async def create_scan(request: ScanRequest) -> ScanResponse:
    for key in request.formats:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            raise HTTPException(
                status_code=400,
                detail="Unknown output format '{}'. Available: {}".format(key, available),
            )

    author_table = build_author_configuration(request.authors)
    file_info = FileInfo(path=request.path, lines=lines_from_text(request.content))
    result = aggregate_annotation_authors(file_info, author_table)
    logger.info(
        "Scanned %s: %d block(s), %d dropped line(s)",
        file_info.path, len(result.blocks), len(result.dropped_lines),
    )

    reports: List[RenderedReport] = []
    for key in request.formats:
        for output in FORMATTERS[key]().format(file_info, result):
            reports.append(RenderedReport(
                format=key,
                suffix=output.suffix,
                media_type=output.media_type,
                content=output.content,
            ))

    return ScanResponse(**build_report(file_info, result), reports=reports)


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available report formats",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(key=key, name=formatter_cls().name)
        for key, formatter_cls in sorted(FORMATTERS.items())
    ]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the authorship-annotator-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
