"""
Unit tests for text normalization helpers.
"""

import pytest

from civics_toolkit.parsing.text import clean_page_markers, normalize_for_matching, split_lines


class TestCleanPageMarkers:
    """Tests for clean_page_markers()."""

    def test_inline_marker_with_comma_removed(self):
        text = ". the Constitution,3 of 19uscis.gov/citizenship"
        assert clean_page_markers(text) == ". the Constitution"

    def test_standalone_marker_leaves_empty_line(self):
        text = ". life\n15 of 19uscis.gov/citizenship\n. liberty"
        assert clean_page_markers(text) == ". life\n\n. liberty"

    def test_marker_with_spaces_between_numbers(self):
        assert clean_page_markers("12   of   19uscis.gov/citizenship") == ""

    def test_text_without_markers_unchanged(self):
        text = "AMERICAN GOVERNMENT\n  A:  Principles  \n"
        assert clean_page_markers(text) == text

    def test_idempotent(self):
        text = "a,1 of 2uscis.gov/citizenship\nb 3 of 4uscis.gov/citizenship c"
        once = clean_page_markers(text)
        assert clean_page_markers(once) == once

    def test_marker_revealed_by_removal_is_removed(self):
        # Removing the inner marker joins "1" and " of 2..." into a new marker
        text = "1,5 of 9uscis.gov/citizenship of 2uscis.gov/citizenship"
        assert clean_page_markers(text) == ""

    def test_custom_site_token(self):
        text = "answer,2 of 7example.org/civics"
        assert clean_page_markers(text, "example.org/civics") == "answer"
        assert clean_page_markers(text) == text


class TestSplitLines:
    """Tests for split_lines()."""

    def test_strips_and_drops_blank_lines(self):
        assert split_lines("  one \r\n\n   \ntwo\n") == ["one", "two"]

    def test_empty_text(self):
        assert split_lines("") == []


class TestNormalizeForMatching:
    """Tests for normalize_for_matching()."""

    @pytest.mark.parametrize("a, b", [
        ("Who is the Governor of your state now?", "Who is the governor of your state now? *"),
        ("Who is one of your state's U.S. Senators now?*", "Who is one of your state’s U.S. senators now?"),
        ("  Name your U.S. Representative.  ", "name your u.s. representative."),
    ])
    def test_equivalent_texts_share_key(self, a, b):
        assert normalize_for_matching(a) == normalize_for_matching(b)

    def test_only_trailing_asterisk_removed(self):
        assert normalize_for_matching("a * b") == "a * b"
