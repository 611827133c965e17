"""Missing-filtered value sequences for plotting.

Histogram binning and scatter plots consume these instead of re-deriving
missingness themselves.
"""

from __future__ import annotations

from statsctl.analysis.typing.models import TypedColumn
from statsctl.core.errors import TypeMismatchError


def present_values(column: TypedColumn) -> tuple[float, ...]:
    """Present values of a Numeric column, in row order.

    Empty for a column without present values, whatever its kind.

    Raises:
        TypeMismatchError: If the column is not Numeric and has present values
    """
    if column.present_count == 0:
        return ()
    return column.numeric_values()


def paired_values(
    x: TypedColumn,
    y: TypedColumn,
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Values of two Numeric columns on rows where both are present.

    Raises:
        TypeMismatchError: If either column is not Numeric and has present values
        ValueError: If the columns have different row counts
    """
    for column in (x, y):
        if not column.is_numeric and column.present_count > 0:
            raise TypeMismatchError(column.name, column.kind)
    if x.row_count != y.row_count:
        raise ValueError(f"Row counts differ: {x.row_count} != {y.row_count}")

    pairs = [(a, b) for a, b in zip(x.values, y.values, strict=True) if a is not None and b is not None]
    xs = tuple(float(a) for a, _ in pairs)  # type: ignore[arg-type]
    ys = tuple(float(b) for _, b in pairs)  # type: ignore[arg-type]
    return xs, ys
