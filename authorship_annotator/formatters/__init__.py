"""Report formatter registry.

WHY: The CLI and the HTTP API need a single lookup to find a formatter by
key. A central dict makes adding a format one import and one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json_report"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API requests)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from authorship_annotator.formatters.json_report import JsonReportFormatter
from authorship_annotator.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from authorship_annotator.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "json_report": JsonReportFormatter,
    "plain_text": PlainTextFormatter,
}


def parse_format_keys(value: str | None) -> list[str]:
    """Split a comma-separated format list and check every key is registered.

    Raises:
        ValueError: If a key is not in FORMATTERS.
    """
    if not value:
        return list(FORMATTERS)
    keys = [key.strip() for key in value.split(",") if key.strip()]
    unknown = [key for key in keys if key not in FORMATTERS]
    if unknown:
        raise ValueError(
            "Unknown format(s): {}. Available: {}".format(
                ", ".join(unknown), ", ".join(sorted(FORMATTERS))
            )
        )
    return keys
