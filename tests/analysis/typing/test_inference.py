"""Tests for type inference."""

import pytest

from statsctl.analysis.typing import (
    describe_types,
    infer_column,
    infer_table,
    is_numeric_literal,
    select_columns,
    select_numeric,
)
from statsctl.core.config import EngineConfig
from statsctl.core.errors import TypeMismatchError
from statsctl.core.models.base import ColumnKind, ErrorKind


class TestNumericLiteral:
    """Tests for the numeric grammar."""

    @pytest.mark.parametrize("value", ["0", "-12", "+3.", "3.14", ".5", "-.5", "1e5", "2.5E-3"])
    def test_accepts(self, value):
        assert is_numeric_literal(value)

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "1,000", "inf", "nan", "1e", "e5", "$5", "0x1F"])
    def test_rejects(self, value):
        assert not is_numeric_literal(value)


class TestInferColumn:
    """Tests for single-column classification."""

    def test_numeric(self):
        column = infer_column("x", ["1", None, "2.5", "-3e1"])

        assert column.kind is ColumnKind.NUMERIC
        assert column.values == (1.0, None, 2.5, -30.0)
        assert column.missing_count == 1

    def test_zero_one_is_numeric(self):
        assert infer_column("flag", ["0", "1", "1"]).kind is ColumnKind.NUMERIC

    def test_boolean_case_insensitive(self):
        column = infer_column("member", ["Yes", "no", "YES", None])

        assert column.kind is ColumnKind.BOOLEAN
        assert column.values == (True, False, True, None)

    def test_boolean_single_distinct_value(self):
        column = infer_column("active", ["true", "TRUE"])

        assert column.kind is ColumnKind.BOOLEAN
        assert column.values == (True, True)

    def test_three_vocabulary_words_are_categorical(self):
        assert infer_column("answer", ["yes", "no", "true"]).kind is ColumnKind.CATEGORICAL

    def test_out_of_vocabulary_is_categorical(self):
        assert infer_column("answer", ["yes", "maybe"]).kind is ColumnKind.CATEGORICAL

    def test_mixed_numeric_is_categorical(self):
        column = infer_column("code", ["1", "2", "A3"])

        assert column.kind is ColumnKind.CATEGORICAL
        assert column.values == ("1", "2", "A3")

    def test_all_missing_is_categorical(self):
        column = infer_column("empty", [None, None, None])

        assert column.kind is ColumnKind.CATEGORICAL
        assert column.levels() == []
        assert column.missing_count == 3

    def test_zero_rows_is_categorical(self):
        column = infer_column("empty", [])

        assert column.kind is ColumnKind.CATEGORICAL
        assert column.row_count == 0

    def test_custom_vocabulary(self):
        config = EngineConfig(true_values=["y"], false_values=["n"])

        column = infer_column("ok", ["Y", "n"], config)

        assert column.kind is ColumnKind.BOOLEAN
        assert column.values == (True, False)
        assert infer_column("ok", ["yes", "no"], config).kind is ColumnKind.CATEGORICAL

    def test_idempotent(self):
        cells = ["1", None, "2"]

        assert infer_column("x", cells) == infer_column("x", cells)

    def test_numeric_values_requires_numeric(self):
        column = infer_column("city", ["Paris"])

        with pytest.raises(TypeMismatchError):
            column.numeric_values()


class TestInferTable:
    """Tests for whole-table inference."""

    def test_preserves_order_and_kinds(self, people_columns):
        assert [c.name for c in people_columns] == ["id", "age", "income", "member", "city"]
        assert [c.kind for c in people_columns] == [
            ColumnKind.NUMERIC,
            ColumnKind.NUMERIC,
            ColumnKind.NUMERIC,
            ColumnKind.BOOLEAN,
            ColumnKind.CATEGORICAL,
        ]

    def test_row_count_preserved(self, people_columns):
        assert all(c.row_count == 4 for c in people_columns)


class TestDescribeTypes:
    """Tests for the type summary view."""

    def test_levels(self, people_columns):
        infos = {info.variable: info for info in describe_types(people_columns)}

        assert infos["age"].levels == []
        assert infos["age"].missing == 1
        assert infos["member"].levels == ["False", "True"]
        assert infos["city"].levels == ["Lyon", "Nice", "Paris"]
        assert infos["city"].unique_count == 3

    def test_many_levels_collapse(self):
        column = infer_column("code", [f"c{i}" for i in range(30)])

        (info,) = describe_types([column], max_levels=20)

        assert info.levels == ["(30 unique)"]


class TestSelection:
    """Tests for resolving requested variables."""

    def test_unknown_names_are_schema_errors(self, people_columns):
        selected, errors = select_columns(people_columns, ["city", "height", "age"])

        assert [c.name for c in selected] == ["city", "age"]
        assert [(e.variable, e.error) for e in errors] == [("height", ErrorKind.SCHEMA)]

    def test_duplicates_kept_once(self, people_columns):
        selected, _ = select_columns(people_columns, ["age", "age"])

        assert [c.name for c in selected] == ["age"]

    def test_numeric_default_skips_others(self, people_columns):
        selected, errors = select_numeric(people_columns)

        assert [c.name for c in selected] == ["id", "age", "income"]
        assert errors == []

    def test_numeric_explicit_request_is_type_mismatch(self, people_columns):
        selected, errors = select_numeric(people_columns, ["age", "city"])

        assert [c.name for c in selected] == ["age"]
        assert errors[0].error is ErrorKind.TYPE_MISMATCH
        assert errors[0].kind is ColumnKind.CATEGORICAL

    def test_numeric_errors_in_request_order(self, people_columns):
        _, errors = select_numeric(people_columns, ["city", "height", "member", "age"])

        assert [(e.variable, e.error) for e in errors] == [
            ("city", ErrorKind.TYPE_MISMATCH),
            ("height", ErrorKind.SCHEMA),
            ("member", ErrorKind.TYPE_MISMATCH),
        ]

    def test_numeric_keeps_requested_all_missing_column(self):
        columns = [infer_column("x", ["1", "2"]), infer_column("empty", [None, None])]

        selected, errors = select_numeric(columns, ["empty", "x"])

        assert [c.name for c in selected] == ["empty", "x"]
        assert errors == []
