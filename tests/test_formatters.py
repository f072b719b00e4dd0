"""Tests for prsummary.formatters module."""

import pytest
from pydantic import ValidationError

from prsummary.formatters import PrSummary, render_pr_summary


class TestPrSummary:
    """Tests for PrSummary model."""

    def test_strips_fields(self):
        summary = PrSummary(title="  Add login  ", description="\n\nBody\n")

        assert summary.title == "Add login"
        assert summary.description == "Body"

    def test_multiline_title_rejected(self):
        with pytest.raises(ValidationError):
            PrSummary(title="Line one\nLine two")

    def test_is_empty(self):
        assert PrSummary().is_empty
        assert not PrSummary(title="Title").is_empty
        assert not PrSummary(description="Body only").is_empty


class TestRenderPrSummary:
    """Tests for render_pr_summary function."""

    def test_renders_markdown_document(self):
        summary = PrSummary(title="Add login", description="- Add endpoint\n- Add model")

        assert render_pr_summary(summary) == "# Add login\n\n- Add endpoint\n- Add model"

    def test_title_only(self):
        assert render_pr_summary(PrSummary(title="Add login")) == "# Add login\n\n"
