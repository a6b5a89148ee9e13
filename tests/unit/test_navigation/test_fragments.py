"""Tests for fragment resolution."""

import re

import pytest

from rfcnav.core.models import Position, Range
from rfcnav.host.workspace import TextDocument
from rfcnav.navigation.fragments import (
    MARKER_PATTERNS,
    FragmentResolver,
    appendix_pattern,
    parse_line_range,
    ref_pattern,
    section_pattern,
)
from rfcnav.navigation.pages import PageIndex

RFC_TEXT = """\
Network Working Group                                          J. Postel
Request for Comments: 2223                                   J. Reynolds
Category: Informational                                              ISI

                    Instructions to RFC Authors

1.  Introduction

   This Request for Comments (RFC) provides information about the
   preferred structure and format of a proposed RFC.

13.2  Unrelated Section

3.2  Header Compression

   Header compression is discussed in [RFC1144].

Appendix A.  Examples

   Example text.

10.  References

   [RFC1144]  Jacobson, V., "Compressing TCP/IP Headers for Low-Speed
              Serial Links", RFC 1144, February 1990.
"""


def _row_of(text, line):
    return text.splitlines().index(line)


@pytest.fixture
def document():
    return TextDocument(RFC_TEXT, rows_per_page=10)


class TestMarkerPatterns:
    """Tests for the structural-marker pattern builders."""

    def test_pattern_sources(self):
        assert section_pattern("3.2").source == r"^ *3\.2\.? "
        assert appendix_pattern("A").source == r"^ *Appendix +A"
        assert ref_pattern("RFC1144").source == r"^ +\[RFC1144\] "

    def test_tokens_are_matched_literally(self):
        pattern = section_pattern("1+1")

        assert pattern.token == "1+1"
        assert pattern.compile().search("1+1 Title\n") is not None
        assert pattern.compile().search("11 Title\n") is None

    def test_registry_covers_marker_kinds(self):
        assert set(MARKER_PATTERNS) == {"appendix", "section", "ref"}
        for build in MARKER_PATTERNS.values():
            assert isinstance(build("x").compile(), re.Pattern)


class TestLineRanges:
    """Tests for GitHub-style line/column markers."""

    def test_single_line(self):
        assert parse_line_range("L10") == Range(Position(9, 0), Position(9, 0))

    def test_line_range(self):
        assert parse_line_range("L10-L12") == Range(Position(9, 0), Position(11, 0))

    def test_line_and_column_range(self):
        assert parse_line_range("L10C5-L10C8") == Range(Position(9, 4), Position(9, 7))

    def test_zero_is_clamped(self):
        assert parse_line_range("L0C0") == Range(Position(0, 0), Position(0, 0))

    def test_at_most_two_markers(self):
        assert parse_line_range("L1-L2-L3") == Range(Position(0, 0), Position(1, 0))

    def test_not_a_line_marker(self):
        assert parse_line_range("section") is None
        assert parse_line_range("") is None
        assert parse_line_range("x-L10") is None


class TestFragmentResolver:
    """Tests for FragmentResolver.apply_fragment."""

    def test_empty_fragment_leaves_document(self, document):
        document.set_selected_range(Range.at(3))
        resolver = FragmentResolver()

        assert resolver.apply_fragment("", document) is document
        assert resolver.apply_fragment(None, document) is document
        assert document.cursor == Position(3, 0)

    def test_section(self, document):
        FragmentResolver().apply_fragment("section-3.2", document)

        assert document.cursor == Position(_row_of(RFC_TEXT, "3.2  Header Compression"), 0)
        assert document.get_selected_range().is_empty
        assert document.scroll_centered is True

    def test_section_with_trailing_period(self, document):
        FragmentResolver().apply_fragment("section-1", document)

        assert document.cursor == Position(_row_of(RFC_TEXT, "1.  Introduction"), 0)

    def test_missing_section_leaves_cursor(self, document):
        document.set_selected_range(Range.at(2, 4))

        FragmentResolver().apply_fragment("section-9.9", document)

        assert document.get_selected_range() == Range.at(2, 4)

    def test_appendix(self, document):
        FragmentResolver().apply_fragment("appendix-A", document)

        assert document.cursor == Position(_row_of(RFC_TEXT, "Appendix A.  Examples"), 0)

    def test_reference(self, document):
        FragmentResolver().apply_fragment("ref-RFC1144", document)

        row = next(
            index
            for index, line in enumerate(RFC_TEXT.splitlines())
            if line.startswith("   [RFC1144]")
        )
        assert document.cursor == Position(row, 0)

    def test_line_fragment_selects_position(self, document):
        FragmentResolver().apply_fragment("L10", document)

        assert document.get_selected_range() == Range(Position(9, 0), Position(9, 0))
        assert document.scroll_position == Position(9, 0)

    def test_line_range_fragment(self, document):
        FragmentResolver().apply_fragment("L10-L12", document)

        assert document.get_selected_range() == Range(Position(9, 0), Position(11, 0))

    def test_column_range_fragment(self, document):
        FragmentResolver().apply_fragment("L10C5-L10C8", document)

        assert document.get_selected_range() == Range(Position(9, 4), Position(9, 7))

    def test_page_fragment_matches_go_to_page(self, paged):
        expected = TextDocument(paged(5), rows_per_page=5)
        PageIndex().go_to_page(3, expected)
        document = TextDocument(paged(5), rows_per_page=5)

        FragmentResolver().apply_fragment("page-3", document)

        assert document.get_selected_range() == expected.get_selected_range()
        assert document.scroll_position == expected.scroll_position

    @pytest.mark.parametrize("fragment", ["page-x", "page-3a", "page--1", "section--1", "bogus"])
    def test_unusable_fragments_leave_document(self, document, fragment):
        document.set_selected_range(Range.at(4))

        FragmentResolver().apply_fragment(fragment, document)

        assert document.cursor == Position(4, 0)
