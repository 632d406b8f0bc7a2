"""Abstract base formatter and output container.

WHY: Every report format consumes the same scanned FileInfo and
AnnotationResult but produces different file content. This base class
enforces a consistent interface so the CLI and the HTTP API can work with
any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; current formatters return one item
- ``suffix`` starts with a hyphen, e.g. ``"-authorship.json"``
- The caller is responsible for prepending the source filename
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from authorship_annotator.core.ir import AnnotationResult, FileInfo


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source name,
                e.g. ``"-authorship.json"`` → ``"Main.java-authorship.json"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all report formatters.

    To add a new report format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'JSON report'."""

    @abstractmethod
    def format(self, file_info: FileInfo, result: AnnotationResult) -> list[FormatterOutput]:
        """Render a scanned file into one or more output files.

        Args:
            file_info: The file after aggregate_annotation_authors().
            result: The scan summary returned for that file.

        Returns:
            List of FormatterOutput objects.
        """
