"""Descriptive statistics module.

Computes column-level statistics on inferred columns:
- Numeric: count, mean, sample std, min, quartiles, median, max
- Boolean/Categorical: value frequencies (top values, unique count)
"""

from statsctl.analysis.statistics.models import (
    STAT_FIELDS,
    CategoricalSummary,
    DescribeResult,
    DescriptiveSummary,
    ValueCount,
)
from statsctl.analysis.statistics.processor import (
    describe_column,
    describe_columns,
    describe_values,
    summarize_categorical,
    summarize_categoricals,
)

__all__ = [
    # Main entry points
    "describe_column",
    "describe_columns",
    "describe_values",
    "summarize_categorical",
    "summarize_categoricals",
    # Pydantic Models
    "CategoricalSummary",
    "DescribeResult",
    "DescriptiveSummary",
    "ValueCount",
    "STAT_FIELDS",
]
