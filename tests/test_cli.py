"""Tests for the command-line interface.

WHY: The CLI is how authors check their annotations. It must print the
report to stdout, keep status on stderr, and fail cleanly on bad input.

HOW: main() is called with explicit argv; SystemExit carries the exit
code. capsys captures stdout/stderr. Files live in tmp_path.
"""

import json

import pytest

from authorship_annotator.cli import build_parser, main

SOURCE = "int a;\n// @@author jane 50\nint b;\n// @@author\n"


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "Main.java"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(["Main.java"])
        assert args.input_file == "Main.java"
        assert args.output_dir is None
        assert args.root is None


class TestMain:

    def test_prints_json_report_to_stdout(self, source_file, capsys):
        code = _run([str(source_file), "--formats", "json_report"])
        captured = capsys.readouterr()

        assert code == 0
        report = json.loads(captured.out)
        assert report["blocks"][0]["start_line"] == 2
        assert report["blocks"][0]["contributions"][0]["author"] == "jane"
        assert report["registered_authors"] == ["jane"]
        assert "1 block(s)" in captured.err

    def test_roster_makes_unknown_names_unknown(self, source_file, tmp_path, capsys):
        roster = tmp_path / "authors.json"
        roster.write_text('{"authors": [{"gitId": "bob"}]}', encoding="utf-8")

        code = _run([str(source_file), "--formats", "json_report", "--author-config", str(roster)])
        report = json.loads(capsys.readouterr().out)

        assert code == 0
        assert report["blocks"][0]["contributions"][0]["author"] == "-"
        assert report["registered_authors"] == []

    def test_saves_reports_to_output_dir(self, source_file, tmp_path):
        out_dir = tmp_path / "out"
        code = _run([str(source_file), "--formats", "json_report,plain_text", "--output-dir", str(out_dir)])

        assert code == 0
        assert (out_dir / "Main.java-authorship.json").is_file()
        assert (out_dir / "Main.java-authorship.txt").is_file()

    def test_conflicting_output_gets_numeric_suffix(self, source_file, tmp_path):
        out_dir = tmp_path / "out"
        _run([str(source_file), "--formats", "plain_text", "--output-dir", str(out_dir)])
        _run([str(source_file), "--formats", "plain_text", "--output-dir", str(out_dir)])

        assert (out_dir / "Main.java-authorship-2.txt").is_file()

    def test_unterminated_block_warning(self, tmp_path, capsys):
        path = tmp_path / "open.py"
        path.write_text("# @@author jane\nx = 1\n", encoding="utf-8")

        code = _run([str(path)])
        captured = capsys.readouterr()

        assert code == 0
        assert "dropped 2 line(s)" in captured.err
        assert "Dropped (unterminated block): 1, 2" in captured.out

    def test_missing_file_exits_1(self, tmp_path, capsys):
        code = _run([str(tmp_path / "missing.java")])
        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_format_exits_1(self, source_file, capsys):
        code = _run([str(source_file), "--formats", "pdf"])
        assert code == 1
        assert "Unknown format" in capsys.readouterr().err
