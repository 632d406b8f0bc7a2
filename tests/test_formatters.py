"""Unit tests for the report formatters.

WHY: Downstream tools parse the JSON report and people read the text
summary. Both must reflect exactly what the scanner claimed and dropped.

HOW: Tests scan a small fixed file and check each formatter's output:
  - JSON: schema validation, block ranges, contributions, line lists
  - Plain text: block paragraphs, footer warnings, no trailing whitespace
"""

import json

import jsonschema
import pytest

from authorship_annotator.core.annotator import aggregate_annotation_authors
from authorship_annotator.formatters import FORMATTERS, parse_format_keys
from authorship_annotator.formatters.json_report import REPORT_SCHEMA, JsonReportFormatter
from authorship_annotator.formatters.plain_text import PlainTextFormatter

from conftest import make_file_info

SAMPLE_LINES = [
    "int a;",
    "/* @@author bob 30 jdoe 70 */",
    "int b;",
    "/* @@author */",
    "// @@author",
    "// @@author zed",
    "int c;",
]


@pytest.fixture
def scanned(roster_table):
    file_info = make_file_info(SAMPLE_LINES)
    result = aggregate_annotation_authors(file_info, roster_table)
    return file_info, result


class TestRegistry:

    def test_registered_formats(self):
        assert set(FORMATTERS) == {"json_report", "plain_text"}

    def test_parse_format_keys_default_is_all(self):
        assert parse_format_keys(None) == list(FORMATTERS)

    def test_parse_format_keys_strips_whitespace(self):
        assert parse_format_keys(" plain_text , json_report ") == ["plain_text", "json_report"]

    def test_parse_format_keys_rejects_unknown(self):
        with pytest.raises(ValueError, match="srt"):
            parse_format_keys("plain_text,srt")


class TestJsonReport:

    def test_output_metadata(self, scanned):
        outputs = JsonReportFormatter().format(*scanned)
        assert len(outputs) == 1
        assert outputs[0].suffix == "-authorship.json"
        assert outputs[0].media_type == "application/json"

    def test_report_matches_schema(self, scanned):
        report = json.loads(JsonReportFormatter().format(*scanned)[0].content)
        jsonschema.validate(instance=report, schema=REPORT_SCHEMA)

    def test_report_content(self, scanned):
        report = json.loads(JsonReportFormatter().format(*scanned)[0].content)
        assert report["path"] == "src/Main.java"
        assert report["blocks"] == [{
            "start_line": 2,
            "end_line": 4,
            "line_count": 3,
            "contributions": [
                {"author": "bob", "display_name": "bob", "weight": 30},
                {"author": "jane", "display_name": "Jane Doe", "weight": 70},
            ],
        }]
        assert report["unclaimed_lines"] == [1, 5]
        assert report["dropped_lines"] == [6, 7]
        assert report["ignored_tag_lines"] == [5]
        assert report["registered_authors"] == []


class TestPlainText:

    def test_output_metadata(self, scanned):
        output = PlainTextFormatter().format(*scanned)[0]
        assert output.suffix == "-authorship.txt"
        assert output.media_type == "text/plain"

    def test_block_paragraph(self, scanned):
        content = PlainTextFormatter().format(*scanned)[0].content
        assert "src/Main.java: 1 annotated block(s)" in content
        assert "Lines 2-4:\n  bob: 30\n  jane (Jane Doe): 70" in content

    def test_footer(self, scanned):
        content = PlainTextFormatter().format(*scanned)[0].content
        assert "Unclaimed lines: 2" in content
        assert "Dropped (unterminated block): 6, 7" in content
        assert "Ignored close tags: 5" in content

    def test_no_trailing_whitespace(self, scanned):
        content = PlainTextFormatter().format(*scanned)[0].content
        for line in content.splitlines():
            assert line == line.rstrip()

    def test_registered_authors_listed(self, open_table):
        file_info = make_file_info(["// @@author zed", "// @@author"])
        result = aggregate_annotation_authors(file_info, open_table)
        content = PlainTextFormatter().format(file_info, result)[0].content
        assert "Registered authors: zed" in content
