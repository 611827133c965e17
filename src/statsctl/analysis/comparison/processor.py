"""Dataset comparison.

Aligns two datasets by column name, runs inference and description on each
side independently, and reports per-column deltas (``b - a``).
"""

from __future__ import annotations

from collections.abc import Sequence

from statsctl.analysis.comparison.models import (
    ColumnComparison,
    ComparisonReport,
    MissingDelta,
    SummaryDelta,
)
from statsctl.analysis.missingness import MissingReport, analyze_missingness
from statsctl.analysis.statistics import DescriptiveSummary, describe_columns
from statsctl.analysis.typing import TypedColumn, infer_table
from statsctl.analysis.typing.selection import is_numeric_candidate
from statsctl.core.config import EngineConfig
from statsctl.core.errors import SchemaError
from statsctl.core.logging import get_logger
from statsctl.sources.csv.models import RawTable

logger = get_logger(__name__)

_DELTA_FIELDS = ("mean", "std", "min", "q1", "median", "q3", "max")


def _difference(a: float | None, b: float | None) -> float | None:
    if a is None or b is None:
        return None
    return b - a


def summary_delta(a: DescriptiveSummary, b: DescriptiveSummary) -> SummaryDelta:
    """Per-statistic ``b - a``."""
    return SummaryDelta(
        count=b.count - a.count,
        **{name: _difference(getattr(a, name), getattr(b, name)) for name in _DELTA_FIELDS},
    )


def missing_delta(a: MissingReport, b: MissingReport) -> MissingDelta:
    return MissingDelta(missing=b.missing - a.missing, pct_missing=b.pct_missing - a.pct_missing)


def compare_columns(
    columns_a: Sequence[TypedColumn],
    columns_b: Sequence[TypedColumn],
    config: EngineConfig | None = None,
    variables: Sequence[str] | None = None,
    label_a: str = "A",
    label_b: str = "B",
) -> ComparisonReport:
    """Compare two sets of inferred columns.

    Args:
        columns_a: Columns of the first dataset (defines report order)
        columns_b: Columns of the second dataset
        config: Engine options
        variables: Optional subset of names; names absent from both sides are errors
        label_a: Display label of the first dataset
        label_b: Display label of the second dataset

    Returns:
        ComparisonReport
    """
    config = config or EngineConfig()
    by_name_a = {c.name: c for c in columns_a}
    by_name_b = {c.name: c for c in columns_b}

    errors = []
    if variables is not None:
        wanted = set(variables)
        for name in dict.fromkeys(variables):
            if name not in by_name_a and name not in by_name_b:
                errors.append(SchemaError(name).to_column_error())
    else:
        wanted = set(by_name_a) | set(by_name_b)

    shared = [c.name for c in columns_a if c.name in by_name_b and c.name in wanted]
    only_in_a = [c.name for c in columns_a if c.name not in by_name_b and c.name in wanted]
    only_in_b = [c.name for c in columns_b if c.name not in by_name_a and c.name in wanted]

    numeric_shared = [
        n for n in shared if is_numeric_candidate(by_name_a[n]) and is_numeric_candidate(by_name_b[n])
    ]
    summaries_a = {
        s.variable: s for s in describe_columns(columns_a, config, numeric_shared).summaries
    }
    summaries_b = {
        s.variable: s for s in describe_columns(columns_b, config, numeric_shared).summaries
    }
    missing_a = {r.variable: r for r in analyze_missingness(columns_a).reports}
    missing_b = {r.variable: r for r in analyze_missingness(columns_b).reports}

    comparisons = []
    for name in shared:
        summary_a = summaries_a.get(name)
        summary_b = summaries_b.get(name)
        comparisons.append(
            ColumnComparison(
                variable=name,
                kind_a=by_name_a[name].kind,
                kind_b=by_name_b[name].kind,
                summary_a=summary_a,
                summary_b=summary_b,
                summary_delta=summary_delta(summary_a, summary_b)
                if summary_a and summary_b
                else None,
                missing_a=missing_a[name],
                missing_b=missing_b[name],
                missing_delta=missing_delta(missing_a[name], missing_b[name]),
            )
        )

    logger.info(
        "datasets_compared",
        shared=len(shared),
        only_in_a=len(only_in_a),
        only_in_b=len(only_in_b),
        failed=len(errors),
    )
    return ComparisonReport(
        label_a=label_a,
        label_b=label_b,
        shared=comparisons,
        only_in_a=only_in_a,
        only_in_b=only_in_b,
        errors=errors,
    )


def compare_tables(
    table_a: RawTable,
    table_b: RawTable,
    config: EngineConfig | None = None,
    variables: Sequence[str] | None = None,
    label_a: str = "A",
    label_b: str = "B",
) -> ComparisonReport:
    """Infer both raw tables independently, then compare them."""
    config = config or EngineConfig()
    return compare_columns(
        infer_table(table_a, config),
        infer_table(table_b, config),
        config=config,
        variables=variables,
        label_a=label_a,
        label_b=label_b,
    )
