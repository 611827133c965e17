"""Type inference module.

Classifies raw text columns into Numeric, Boolean or Categorical
TypedColumns.
"""

from statsctl.analysis.typing.inference import (
    classify,
    describe_types,
    infer_column,
    infer_table,
    is_numeric_literal,
)
from statsctl.analysis.typing.models import TypedColumn, TypeInfo, Value
from statsctl.analysis.typing.selection import (
    is_numeric_candidate,
    select_columns,
    select_numeric,
)

__all__ = [
    # Main entry points
    "infer_column",
    "infer_table",
    "describe_types",
    # Helpers
    "classify",
    "is_numeric_literal",
    "select_columns",
    "select_numeric",
    "is_numeric_candidate",
    # Models
    "TypedColumn",
    "TypeInfo",
    "Value",
]
