"""Resolve a requested variable subset against inferred columns."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from statsctl.analysis.typing.models import TypedColumn
from statsctl.core.errors import SchemaError, TypeMismatchError
from statsctl.core.models.base import ColumnError


def _resolve(
    columns: Sequence[TypedColumn],
    variables: Sequence[str],
    accept: Callable[[TypedColumn], bool],
) -> tuple[list[TypedColumn], list[ColumnError]]:
    """One pass over the request; errors come out in request order."""
    by_name = {column.name: column for column in columns}
    selected: list[TypedColumn] = []
    errors: list[ColumnError] = []
    for name in dict.fromkeys(variables):
        column = by_name.get(name)
        if column is None:
            errors.append(SchemaError(name).to_column_error())
        elif accept(column):
            selected.append(column)
        else:
            errors.append(TypeMismatchError(column.name, column.kind).to_column_error())
    return selected, errors


def is_numeric_candidate(column: TypedColumn) -> bool:
    """Numeric, or without any present value (an undefined numeric summary)."""
    return column.is_numeric or column.present_count == 0


def select_columns(
    columns: Sequence[TypedColumn],
    variables: Sequence[str] | None = None,
) -> tuple[list[TypedColumn], list[ColumnError]]:
    """Pick columns by name, in request order.

    Unknown names become SCHEMA errors instead of aborting the request.
    Without a selection every column is returned in table order.
    Duplicate names in the request are kept once.
    """
    if variables is None:
        return list(columns), []
    return _resolve(columns, variables, lambda column: True)


def select_numeric(
    columns: Sequence[TypedColumn],
    variables: Sequence[str] | None = None,
) -> tuple[list[TypedColumn], list[ColumnError]]:
    """Pick Numeric columns.

    Without a selection non-numeric columns are skipped silently. An explicit
    request for a non-numeric column is a TYPE_MISMATCH error, except for a
    column with no present values, which is kept and yields undefined results.
    """
    if variables is None:
        return [c for c in columns if c.is_numeric], []
    return _resolve(columns, variables, is_numeric_candidate)
