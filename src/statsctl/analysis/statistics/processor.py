"""Descriptive statistics over TypedColumns.

Each column's summary depends only on that column, so batches are computed
on a thread pool and collected in submission order.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from statsctl.analysis.statistics import algorithms
from statsctl.analysis.statistics.models import (
    CategoricalSummary,
    DescribeResult,
    DescriptiveSummary,
    ValueCount,
)
from statsctl.analysis.typing.models import TypedColumn
from statsctl.analysis.typing.selection import select_columns, select_numeric
from statsctl.core.config import EngineConfig
from statsctl.core.errors import TypeMismatchError
from statsctl.core.logging import get_logger
from statsctl.core.models.base import ColumnKind

logger = get_logger(__name__)

DEFAULT_TOP_N = 10


def describe_values(
    variable: str,
    values: Sequence[float],
    config: EngineConfig | None = None,
) -> DescriptiveSummary:
    """Summarize present numeric values.

    Args:
        variable: Name to report
        values: Present values (no missing markers, no NaN)
        config: Engine options (quantile method)

    Returns:
        DescriptiveSummary; all statistics None when ``values`` is empty
    """
    config = config or EngineConfig()
    data = algorithms.as_array(values)
    if data.size == 0:
        return DescriptiveSummary(variable=variable, count=0)

    center = algorithms.mean(data)
    std = algorithms.sample_std(data, center)
    ordered = algorithms.sort_values(data)
    q1, median, q3 = algorithms.quantiles(ordered, method=config.quantile_method)

    return DescriptiveSummary(
        variable=variable,
        count=int(data.size),
        mean=center,
        std=std,
        min=float(ordered[0]),
        q1=q1,
        median=median,
        q3=q3,
        max=float(ordered[-1]),
    )


def describe_column(column: TypedColumn, config: EngineConfig | None = None) -> DescriptiveSummary:
    """Summarize one Numeric column.

    A column without present values yields an undefined summary whatever
    its inferred kind.

    Raises:
        TypeMismatchError: If the column is not Numeric and has present values
    """
    values = () if column.present_count == 0 else column.numeric_values()
    summary = describe_values(column.name, values, config)
    logger.debug("column_described", column=column.name, count=summary.count)
    return summary


def describe_columns(
    columns: Sequence[TypedColumn],
    config: EngineConfig | None = None,
    variables: Sequence[str] | None = None,
) -> DescribeResult:
    """Summarize a batch of columns.

    Without ``variables`` every Numeric column is described. With an explicit
    selection, unknown names and non-numeric columns are reported as errors
    while every other requested column is still summarized.

    Args:
        columns: Inferred columns of one table
        config: Engine options (quantile method, worker count)
        variables: Optional subset of column names, in report order

    Returns:
        DescribeResult with summaries in request (or table) order
    """
    config = config or EngineConfig()
    selected, errors = select_numeric(columns, variables)

    if not selected:
        return DescribeResult(summaries=[], errors=errors)

    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        futures = [pool.submit(describe_column, column, config) for column in selected]
        summaries = [future.result() for future in futures]

    logger.info(
        "columns_described",
        described=len(summaries),
        failed=len(errors),
        undefined=sum(1 for s in summaries if not s.is_defined),
    )
    return DescribeResult(summaries=summaries, errors=errors)


def summarize_categorical(column: TypedColumn, top_n: int = DEFAULT_TOP_N) -> CategoricalSummary:
    """Frequency summary of a Boolean or Categorical column.

    Top values are ordered by count, ties by first appearance.

    Raises:
        TypeMismatchError: If the column is Numeric
    """
    if column.kind is ColumnKind.NUMERIC:
        raise TypeMismatchError(column.name, column.kind)

    counts = Counter(str(v) for v in column.present_values())
    present = column.present_count
    top_values = [
        ValueCount(value=value, count=count, percentage=count / present * 100.0)
        for value, count in counts.most_common(top_n)
    ]
    return CategoricalSummary(
        variable=column.name,
        kind=column.kind,
        total=column.row_count,
        missing=column.missing_count,
        unique=len(counts),
        top_values=top_values,
    )


def summarize_categoricals(
    columns: Sequence[TypedColumn],
    variables: Sequence[str] | None = None,
    top_n: int = DEFAULT_TOP_N,
) -> list[CategoricalSummary]:
    """Frequency summaries of every non-numeric column (optionally a subset)."""
    selected, _ = select_columns(columns, variables)
    return [
        summarize_categorical(column, top_n)
        for column in selected
        if column.kind is not ColumnKind.NUMERIC
    ]
