"""Missing-value analysis module.

Per-column missing counts and percentages, rows with any missing value,
and joint missingness patterns.
"""

from statsctl.analysis.missingness.models import MissingnessResult, MissingPattern, MissingReport
from statsctl.analysis.missingness.processor import (
    analyze_missingness,
    analyze_presence,
    analyze_table_missingness,
    only_missing,
)

__all__ = [
    "analyze_missingness",
    "analyze_presence",
    "analyze_table_missingness",
    "only_missing",
    "MissingnessResult",
    "MissingPattern",
    "MissingReport",
]
