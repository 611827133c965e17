"""Descriptive statistics models.

Pydantic models for summary data structures:
- DescriptiveSummary: count, mean, std and five-number summary of a Numeric column
- CategoricalSummary: value frequencies of a Boolean or Categorical column
- ValueCount: Frequency count for top values
- DescribeResult: batch output with per-column errors
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from statsctl.core.models.base import ColumnError, ColumnKind

STAT_FIELDS = ("count", "mean", "std", "min", "q1", "median", "q3", "max")


class DescriptiveSummary(BaseModel):
    """Summary of a Numeric column.

    ``count`` is the present (non-missing) count. With ``count == 0`` every
    other statistic is None (undefined).
    """

    model_config = ConfigDict(frozen=True)

    variable: str
    count: int
    mean: float | None = None
    std: float | None = None
    min: float | None = None
    q1: float | None = None
    median: float | None = None
    q3: float | None = None
    max: float | None = None

    @property
    def is_defined(self) -> bool:
        return self.count > 0


class ValueCount(BaseModel):
    """A value with its count."""

    model_config = ConfigDict(frozen=True)

    value: str
    count: int
    percentage: float


class CategoricalSummary(BaseModel):
    """Frequency summary of a Boolean or Categorical column."""

    model_config = ConfigDict(frozen=True)

    variable: str
    kind: ColumnKind
    total: int
    missing: int
    unique: int
    top_values: list[ValueCount] = Field(default_factory=list)


class DescribeResult(BaseModel):
    """Summaries for a batch of columns plus the columns that failed."""

    model_config = ConfigDict(frozen=True)

    summaries: list[DescriptiveSummary] = Field(default_factory=list)
    errors: list[ColumnError] = Field(default_factory=list)
