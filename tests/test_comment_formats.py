"""Unit tests for comment format matching and parameter extraction.

WHY: A tag that is mistaken for ordinary content silently loses an
authorship override; ordinary content mistaken for a tag steals lines
from blame. Both directions must be pinned down per comment syntax.

HOW: Tests cover each of the five syntaxes, priority order, anchoring to
the whole line, tolerated end markers, and the parameter extractor's
handling of end markers and bare tags.
"""

import pytest

from authorship_annotator.core.comment_formats import (
    COMMENT_FORMATS,
    NO_MATCH,
    check_valid_comment_line,
    extract_author_parameters,
)


class TestCommentFormatOrder:
    """The five syntaxes are tried in a fixed priority order."""

    def test_five_formats_in_priority_order(self):
        names = [f.name for f in COMMENT_FORMATS]
        assert names == ["double_slash", "slash_star", "hash", "html", "percent"]

    def test_only_block_formats_have_end_markers(self):
        assert [f.has_end_marker for f in COMMENT_FORMATS] == [False, True, False, True, False]


class TestCheckValidCommentLine:
    """Whole-line matching of @@author comment lines."""

    @pytest.mark.parametrize("line,expected", [
        ("// @@author jane", 0),
        ("/* @@author jane */", 1),
        ("# @@author jane", 2),
        ("<!-- @@author jane -->", 3),
        ("% @@author jane", 4),
    ])
    def test_each_syntax(self, line, expected):
        assert check_valid_comment_line(line) == expected

    def test_leading_and_trailing_whitespace_allowed(self):
        assert check_valid_comment_line("    // @@author jane 50   ") == 0
        assert check_valid_comment_line("\t# @@author") == 2

    def test_no_space_after_comment_start(self):
        assert check_valid_comment_line("//@@author jane") == 0

    def test_end_marker_is_optional(self):
        assert check_valid_comment_line("/* @@author jane") == 1
        assert check_valid_comment_line("<!-- @@author jane") == 3

    def test_bare_tags_match(self):
        assert check_valid_comment_line("// @@author") == 0
        assert check_valid_comment_line("/* @@author */") == 1
        assert check_valid_comment_line("<!-- @@author -->") == 3

    def test_tag_after_code_is_not_a_comment_line(self):
        assert check_valid_comment_line("int x = 1; // @@author jane") == NO_MATCH

    def test_tag_inside_string_literal(self):
        assert check_valid_comment_line('print("@@author jane")') == NO_MATCH

    def test_text_before_tag_inside_comment(self):
        assert check_valid_comment_line("// see @@author jane") == NO_MATCH

    def test_unsupported_comment_syntax(self):
        assert check_valid_comment_line("-- @@author jane") == NO_MATCH
        assert check_valid_comment_line("; @@author jane") == NO_MATCH

    def test_line_without_tag(self):
        assert check_valid_comment_line("// ordinary comment") == NO_MATCH

    def test_non_ascii_space_does_not_separate_tokens(self):
        assert check_valid_comment_line("// @@author\u2003jane") == NO_MATCH
        assert check_valid_comment_line("//\u00a0@@author jane") == NO_MATCH


class TestExtractAuthorParameters:
    """Parameters sit between the tag and the comment's end marker."""

    def test_line_comment_parameters(self):
        assert extract_author_parameters("// @@author jane 50", 0) == "jane 50"

    def test_block_comment_end_marker_stripped(self):
        assert extract_author_parameters("/* @@author bob 30 carol 70 */", 1) == "bob 30 carol 70"

    def test_html_end_marker_stripped(self):
        assert extract_author_parameters("<!-- @@author !!! -->", 3) == "!!!"

    def test_end_marker_without_space(self):
        assert extract_author_parameters("/* @@author jane*/", 1) == "jane"

    def test_bare_tag_is_none(self):
        assert extract_author_parameters("// @@author", 0) is None

    def test_bare_tag_with_trailing_whitespace_is_none(self):
        assert extract_author_parameters("# @@author    ", 2) is None

    def test_bare_block_tag_is_none(self):
        assert extract_author_parameters("/* @@author */", 1) is None
        assert extract_author_parameters("<!-- @@author-->", 3) is None

    def test_missing_marker_is_none(self):
        assert extract_author_parameters("// nothing here", 0) is None

    def test_everything_after_first_marker_is_kept(self):
        assert extract_author_parameters("% @@author jane @@author", 4) == "jane @@author"
