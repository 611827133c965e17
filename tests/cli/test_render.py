"""Tests for report rendering."""

import pytest

from statsctl.analysis.missingness import analyze_missingness
from statsctl.analysis.statistics import DescriptiveSummary
from statsctl.cli.render import (
    View,
    format_number,
    format_signed,
    missing_summary_view,
    summary_view,
    to_csv,
    to_markdown,
)


class TestFormatNumber:
    """Tests for numeric cell formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "N/A"),
            (0.0, "0.00"),
            (1.5, "1.50"),
            (-2.0, "-2.00"),
            (1234.567, "1234.57"),
            (0.5, "0.5000"),
            (-0.25, "-0.2500"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected

    def test_signed(self):
        assert format_signed(2.0) == "+2.00"
        assert format_signed(-1) == "-1"
        assert format_signed(0) == "0"
        assert format_signed(None) == "N/A"


class TestViews:
    """Tests for building views from engine models."""

    def test_undefined_summary_renders_na(self):
        view = summary_view([DescriptiveSummary(variable="empty", count=0)])

        assert view.rows == [["empty", "0", "N/A", "N/A", "N/A", "N/A", "N/A", "N/A", "N/A"]]

    def test_missing_summary_text(self, people_columns):
        view = missing_summary_view(analyze_missingness(people_columns))

        assert view.text.startswith("75.00% of observations (3 of 4)")


class TestExport:
    """Tests for Markdown and CSV export."""

    @pytest.fixture
    def views(self):
        return [
            View(title="Numbers", headers=["name", "value"], rows=[["a|b", "1"], ["c,d", "2"]]),
            View(title="", text="note"),
        ]

    def test_markdown(self, views):
        content = to_markdown(views)

        assert content.splitlines()[:4] == ["## Numbers", "", "| name | value |", "|---|---|"]
        assert "| a\\|b | 1 |" in content
        assert content.endswith("```\nnote\n```")

    def test_csv_skips_text(self, views):
        assert to_csv(views) == 'name,value\na|b,1\n"c,d",2'
