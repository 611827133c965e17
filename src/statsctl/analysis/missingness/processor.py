"""Missing-value analysis.

Works on presence alone, so a column's kind is irrelevant and analysis can
run before or after type inference. Never fails: a degenerate table yields a
well-formed, all-zero result.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from statsctl.analysis.missingness.models import MissingnessResult, MissingPattern, MissingReport
from statsctl.analysis.typing.models import TypedColumn
from statsctl.core.logging import get_logger
from statsctl.sources.csv.models import RawTable

logger = get_logger(__name__)


def _percent(part: int, whole: int) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


def _missing_patterns(
    names: Sequence[str],
    absent: np.ndarray,
    total_rows: int,
) -> list[MissingPattern]:
    """Group rows by their absent-column bitmask.

    Most frequent first; ties keep first-seen order.
    """
    counts: dict[bytes, int] = {}
    first_row: dict[bytes, np.ndarray] = {}
    for row in absent.T:
        key = np.packbits(row).tobytes()
        if key not in counts:
            counts[key] = 0
            first_row[key] = row
        counts[key] += 1

    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [
        MissingPattern(
            missing_columns=[names[i] for i in np.flatnonzero(first_row[key])],
            count=count,
            pct=_percent(count, total_rows),
        )
        for key, count in ordered
    ]


def analyze_presence(
    names: Sequence[str],
    absent: np.ndarray,
    patterns: bool = False,
) -> MissingnessResult:
    """Analyze a boolean absent-matrix of shape (columns, rows).

    Args:
        names: Column names, one per matrix row
        absent: True where a cell is missing
        patterns: Also compute joint missingness patterns

    Returns:
        MissingnessResult
    """
    total_rows = int(absent.shape[1]) if absent.ndim == 2 else 0
    missing_per_column = absent.sum(axis=1) if absent.size else np.zeros(len(names), dtype=int)

    reports = [
        MissingReport(
            variable=name,
            missing=int(missing),
            pct_missing=_percent(int(missing), total_rows),
        )
        for name, missing in zip(names, missing_per_column, strict=True)
    ]

    # Joint pass over row indices, independent of the per-column counts
    rows_with_any = int(absent.any(axis=0).sum()) if absent.size else 0

    result = MissingnessResult(
        reports=reports,
        total_rows=total_rows,
        rows_with_any_missing=rows_with_any,
        pct_rows_with_any_missing=_percent(rows_with_any, total_rows),
        patterns=_missing_patterns(names, absent, total_rows) if patterns and absent.size else [],
    )
    logger.debug(
        "missingness_analyzed",
        columns=len(names),
        rows=total_rows,
        rows_with_any_missing=rows_with_any,
    )
    return result


def analyze_missingness(
    columns: Sequence[TypedColumn],
    patterns: bool = False,
) -> MissingnessResult:
    """Missing counts per column and across columns.

    Args:
        columns: Columns of one table (equal row counts)
        patterns: Also compute joint missingness patterns

    Returns:
        MissingnessResult
    """
    names = [column.name for column in columns]
    rows = columns[0].row_count if columns else 0
    absent = np.zeros((len(columns), rows), dtype=bool)
    for i, column in enumerate(columns):
        if column.row_count != rows:
            raise ValueError(
                f"Column '{column.name}' has {column.row_count} rows, expected {rows}"
            )
        absent[i] = [v is None for v in column.values]
    return analyze_presence(names, absent, patterns)


def analyze_table_missingness(table: RawTable, patterns: bool = False) -> MissingnessResult:
    """Missing-value analysis directly on raw cells, before inference."""
    absent = np.array(
        [[cell is None for cell in cells] for cells in table.columns],
        dtype=bool,
    ).reshape(table.column_count, table.row_count)
    return analyze_presence(list(table.names), absent, patterns)


def only_missing(reports: Sequence[MissingReport]) -> list[MissingReport]:
    """Reports of columns with at least one missing value."""
    return [report for report in reports if report.missing > 0]
