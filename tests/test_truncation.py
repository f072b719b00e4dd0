"""Tests for prsummary.truncation module."""

import pytest

from prsummary.truncation import TruncationResult, truncate_text


class TestTruncateText:
    """Tests for truncate_text function."""

    @pytest.mark.parametrize("text", ["", "short", "x" * 10000])
    def test_fitting_text_is_unchanged(self, text):
        """Test that text within the limit comes back identical."""
        result = truncate_text(text, 10000)

        assert result == TruncationResult(text, False)
        assert result.text is text

    def test_long_text_is_cut_to_max_size(self):
        text = "a" * 10001

        result = truncate_text(text, 10000)

        assert len(result.text) == 10000
        assert result.was_truncated is True

    def test_cut_may_split_a_hunk(self):
        """Test that the cut is a plain character cut."""
        diff = "@@ -1,2 +1,2 @@\n-old line\n+new line\n"

        result = truncate_text(diff, 20)

        assert result.text == diff[:20]
        assert result.was_truncated

    def test_zero_max_size(self):
        assert truncate_text("abc", 0) == TruncationResult("", True)

    def test_negative_max_size_raises(self):
        with pytest.raises(ValueError):
            truncate_text("abc", -1)

    def test_counts_characters_not_bytes(self):
        text = "é" * 5

        assert truncate_text(text, 5) == TruncationResult(text, False)
        assert truncate_text(text, 3).text == "ééé"
