"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (typing, statistics, correlation, etc.).
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value


# === Enums ===


class ColumnKind(str, Enum):
    """Inferred semantic type of a column."""

    NUMERIC = "Numeric"
    BOOLEAN = "Boolean"
    CATEGORICAL = "Categorical"


class QuantileMethod(str, Enum):
    """Interpolation between order statistics.

    Names follow numpy's ``method`` argument to ``np.quantile``.
    """

    LINEAR = "linear"
    LOWER = "lower"
    HIGHER = "higher"
    NEAREST = "nearest"
    MIDPOINT = "midpoint"


class CorrelationMethod(str, Enum):
    """Supported correlation coefficients."""

    PEARSON = "pearson"


class ErrorKind(str, Enum):
    """Per-column failure categories reported by batch operations."""

    SCHEMA = "schema"  # Variable not in the table
    TYPE_MISMATCH = "type_mismatch"  # Numeric operation on non-numeric column
    EMPTY_INPUT = "empty_input"  # No present values


# === Errors as data ===


class ColumnError(BaseModel):
    """A single column's failure inside an otherwise successful batch."""

    model_config = ConfigDict(frozen=True)

    variable: str
    error: ErrorKind
    message: str
    kind: ColumnKind | None = None
