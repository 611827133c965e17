"""Tests for descriptive statistics over TypedColumns."""

import math

import pytest

from statsctl.analysis.statistics import (
    describe_column,
    describe_columns,
    describe_values,
    summarize_categorical,
    summarize_categoricals,
)
from statsctl.analysis.typing import infer_column
from statsctl.core.config import EngineConfig
from statsctl.core.errors import TypeMismatchError
from statsctl.core.models.base import ColumnKind, ErrorKind, QuantileMethod


class TestDescribeColumn:
    """Tests for single-column summaries."""

    def test_one_to_five(self, config):
        summary = describe_column(infer_column("x", ["1", "2", "3", "4", "5"]), config)

        assert summary.count == 5
        assert summary.mean == pytest.approx(3.0)
        assert summary.std == pytest.approx(math.sqrt(2.5))
        assert summary.min == 1.0
        assert summary.q1 == pytest.approx(2.0)
        assert summary.median == pytest.approx(3.0)
        assert summary.q3 == pytest.approx(4.0)
        assert summary.max == 5.0

    def test_missing_values_excluded(self, config):
        summary = describe_column(infer_column("x", ["10", None, "20", None, "30"]), config)

        assert summary.count == 3
        assert summary.mean == pytest.approx(20.0)
        assert summary.median == pytest.approx(20.0)

    def test_constant_column(self, config):
        summary = describe_column(infer_column("x", ["5", "5", "5", "5"]), config)

        assert summary.std == 0.0
        assert summary.min == summary.max == 5.0

    def test_constant_decimal_column(self, config):
        summary = describe_column(infer_column("flat", ["0.1", "0.1", "0.1"]), config)

        assert summary.std == 0.0
        assert summary.min == summary.max == 0.1

    def test_all_missing_column_is_undefined(self, config):
        summary = describe_column(infer_column("empty", [None, None, None]), config)

        assert summary.count == 0
        assert not summary.is_defined

    def test_single_value(self, config):
        summary = describe_column(infer_column("x", ["7"]), config)

        assert summary.count == 1
        assert summary.std == 0.0
        assert summary.q1 == summary.median == summary.q3 == 7.0

    def test_non_numeric_raises(self, config):
        with pytest.raises(TypeMismatchError) as exc:
            describe_column(infer_column("city", ["Paris", "Lyon"]), config)

        assert exc.value.kind is ColumnKind.CATEGORICAL

    def test_quantile_method_from_config(self):
        column = infer_column("x", ["1", "2", "3", "4"])

        summary = describe_column(column, EngineConfig(quantile_method=QuantileMethod.LOWER))

        assert summary.q1 == 1.0
        assert summary.median == 2.0

    def test_ordering_invariant(self, config):
        cells = ["3.5", "-2", "8", "0.25", "8", "13", None, "-7.5"]

        s = describe_column(infer_column("x", cells), config)

        assert s.min <= s.q1 <= s.median <= s.q3 <= s.max
        assert s.std >= 0

    def test_idempotent(self, config):
        column = infer_column("x", ["2", "9", "4"])

        assert describe_column(column, config) == describe_column(column, config)


class TestDescribeValues:
    """Tests for summaries of raw value sequences."""

    def test_empty_is_undefined(self):
        summary = describe_values("empty", [])

        assert summary.count == 0
        assert not summary.is_defined
        assert summary.mean is None
        assert summary.std is None
        assert summary.median is None

    def test_all_missing_column_summary_is_undefined(self):
        column = infer_column("empty", [None, None])

        summary = describe_values(column.name, column.present_values())

        assert column.kind is ColumnKind.CATEGORICAL
        assert not summary.is_defined


class TestDescribeColumns:
    """Tests for batch summaries."""

    def test_defaults_to_numeric_columns(self, people_columns, config):
        result = describe_columns(people_columns, config)

        assert [s.variable for s in result.summaries] == ["id", "age", "income"]
        assert result.errors == []
        assert result.summaries[1].mean == pytest.approx(40.0)

    def test_errors_do_not_abort_batch(self, people_columns, config):
        result = describe_columns(people_columns, config, ["income", "height", "city", "age"])

        assert [s.variable for s in result.summaries] == ["income", "age"]
        assert [(e.variable, e.error) for e in result.errors] == [
            ("height", ErrorKind.SCHEMA),
            ("city", ErrorKind.TYPE_MISMATCH),
        ]

    def test_requested_all_missing_column_is_summarized(self, config):
        columns = [infer_column("x", ["1", "2"]), infer_column("empty", [None, None])]

        result = describe_columns(columns, config, ["x", "empty"])

        assert [s.variable for s in result.summaries] == ["x", "empty"]
        assert result.errors == []
        assert result.summaries[1].count == 0
        assert not result.summaries[1].is_defined

    def test_all_missing_column_skipped_by_default(self, config):
        columns = [infer_column("x", ["1", "2"]), infer_column("empty", [None, None])]

        result = describe_columns(columns, config)

        assert [s.variable for s in result.summaries] == ["x"]

    def test_parallel_matches_sequential(self, people_columns):
        sequential = describe_columns(people_columns, EngineConfig(max_workers=1))
        parallel = describe_columns(people_columns, EngineConfig(max_workers=4))

        assert sequential == parallel

    def test_no_numeric_columns(self, config):
        result = describe_columns([infer_column("city", ["Paris"])], config)

        assert result.summaries == []
        assert result.errors == []


class TestCategoricalSummary:
    """Tests for value-frequency summaries."""

    def test_top_values(self, people_columns):
        city = next(c for c in people_columns if c.name == "city")

        summary = summarize_categorical(city)

        assert summary.total == 4
        assert summary.missing == 0
        assert summary.unique == 3
        assert summary.top_values[0].value == "Paris"
        assert summary.top_values[0].count == 2
        assert summary.top_values[0].percentage == pytest.approx(50.0)

    def test_ties_keep_first_appearance(self):
        column = infer_column("c", ["b", "a", "b", "a", "c"])

        summary = summarize_categorical(column)

        assert [v.value for v in summary.top_values] == ["b", "a", "c"]

    def test_boolean_values(self, people_columns):
        member = next(c for c in people_columns if c.name == "member")

        summary = summarize_categorical(member)

        assert summary.kind is ColumnKind.BOOLEAN
        assert summary.missing == 1
        assert summary.top_values[0].value == "True"

    def test_top_n(self):
        column = infer_column("c", [f"v{i}" for i in range(15)])

        assert len(summarize_categorical(column, top_n=5).top_values) == 5

    def test_numeric_raises(self):
        with pytest.raises(TypeMismatchError):
            summarize_categorical(infer_column("x", ["1"]))

    def test_batch_skips_numeric(self, people_columns):
        summaries = summarize_categoricals(people_columns)

        assert [s.variable for s in summaries] == ["member", "city"]
