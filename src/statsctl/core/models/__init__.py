"""Core models: ONLY truly shared base types.

Domain models live in their respective packages:
- analysis/typing/models.py      → TypedColumn, TypeInfo
- analysis/statistics/models.py  → DescriptiveSummary, CategoricalSummary
- analysis/missingness/models.py → MissingReport, MissingnessResult
- analysis/correlation/models.py → CorrelationMatrix, CorrelationPair
- analysis/comparison/models.py  → ComparisonReport
- sources/csv/models.py          → RawTable
"""

from statsctl.core.models.base import (
    ColumnError,
    ColumnKind,
    CorrelationMethod,
    ErrorKind,
    QuantileMethod,
    Result,
)

__all__ = [
    "ColumnError",
    "ColumnKind",
    "CorrelationMethod",
    "ErrorKind",
    "QuantileMethod",
    "Result",
]
