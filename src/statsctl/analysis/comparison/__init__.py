"""Dataset comparison module.

Aligns two datasets by column name and reports per-column statistic and
missing-value deltas, plus the columns unique to each side.
"""

from statsctl.analysis.comparison.models import (
    ColumnComparison,
    ComparisonReport,
    MissingDelta,
    SummaryDelta,
)
from statsctl.analysis.comparison.processor import (
    compare_columns,
    compare_tables,
    missing_delta,
    summary_delta,
)

__all__ = [
    # Main entry points
    "compare_columns",
    "compare_tables",
    "missing_delta",
    "summary_delta",
    # Models
    "ColumnComparison",
    "ComparisonReport",
    "MissingDelta",
    "SummaryDelta",
]
