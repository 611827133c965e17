"""Tests for dataset comparison."""

import pytest

from statsctl.analysis.comparison import compare_columns, compare_tables, summary_delta
from statsctl.analysis.statistics import DescriptiveSummary
from statsctl.analysis.typing import infer_column
from statsctl.core.models.base import ColumnKind, ErrorKind
from statsctl.sources.csv import RawTable


@pytest.fixture
def table_a() -> RawTable:
    return RawTable.from_columns(
        {
            "age": ["25", "30", "35"],
            "city": ["Paris", "Lyon", None],
            "legacy": ["1", "2", "3"],
        }
    )


@pytest.fixture
def table_b() -> RawTable:
    return RawTable.from_columns(
        {
            "score": ["7", "8", "9", "10"],
            "age": ["28", "32", "36", None],
            "city": ["Nice", "Lyon", "Paris", "Paris"],
        }
    )


class TestCompareTables:
    """Tests for column-aligned comparison."""

    def test_mean_delta(self, table_a, table_b, config):
        report = compare_tables(table_a, table_b, config)

        age = report.get("age")
        assert age.summary_a.mean == pytest.approx(30.0)
        assert age.summary_b.mean == pytest.approx(32.0)
        assert age.summary_delta.mean == pytest.approx(2.0)
        assert age.summary_delta.count == 0

    def test_column_order(self, table_a, table_b, config):
        report = compare_tables(table_a, table_b, config)

        assert [c.variable for c in report.shared] == ["age", "city"]
        assert report.only_in_a == ["legacy"]
        assert report.only_in_b == ["score"]
        assert report.columns == ["age", "city", "legacy", "score"]

    def test_missing_delta(self, table_a, table_b, config):
        report = compare_tables(table_a, table_b, config)

        age = report.get("age")
        assert age.missing_delta.missing == 1
        assert age.missing_delta.pct_missing == pytest.approx(25.0)

        city = report.get("city")
        assert city.missing_delta.missing == -1

    def test_non_numeric_has_no_summary_delta(self, table_a, table_b, config):
        city = compare_tables(table_a, table_b, config).get("city")

        assert city.kind_a is ColumnKind.CATEGORICAL
        assert city.summary_delta is None

    def test_variable_selection(self, table_a, table_b, config):
        report = compare_tables(table_a, table_b, config, variables=["score", "age", "height"])

        assert [c.variable for c in report.shared] == ["age"]
        assert report.only_in_a == []
        assert report.only_in_b == ["score"]
        assert [(e.variable, e.error) for e in report.errors] == [("height", ErrorKind.SCHEMA)]

    def test_labels(self, table_a, table_b, config):
        report = compare_tables(table_a, table_b, config, label_a="before.csv", label_b="after.csv")

        assert (report.label_a, report.label_b) == ("before.csv", "after.csv")

    def test_unknown_lookup(self, table_a, table_b, config):
        with pytest.raises(KeyError):
            compare_tables(table_a, table_b, config).get("legacy")


class TestCompareColumns:
    """Tests for comparison of already-inferred columns."""

    def test_kind_change_drops_summary_delta(self, config):
        a = [infer_column("code", ["1", "2"])]
        b = [infer_column("code", ["1", "X"])]

        comparison = compare_columns(a, b, config).get("code")

        assert comparison.kind_a is ColumnKind.NUMERIC
        assert comparison.kind_b is ColumnKind.CATEGORICAL
        assert comparison.summary_a is None
        assert comparison.summary_delta is None

    def test_undefined_side(self, config):
        a = [infer_column("x", ["1", "2"])]
        b = [infer_column("x", ["5", None])]

        delta = compare_columns(a, b, config).get("x").summary_delta

        assert delta.count == -1
        assert delta.mean == pytest.approx(3.5)


class TestSummaryDelta:
    """Tests for per-statistic differences."""

    def test_undefined_propagates(self):
        a = DescriptiveSummary(variable="x", count=0)
        b = DescriptiveSummary(variable="x", count=2, mean=1.0, std=0.5)

        delta = summary_delta(a, b)

        assert delta.count == 2
        assert delta.mean is None
        assert delta.std is None
