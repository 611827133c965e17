"""Dataset comparison models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from statsctl.analysis.missingness.models import MissingReport
from statsctl.analysis.statistics.models import DescriptiveSummary
from statsctl.core.models.base import ColumnError, ColumnKind


class SummaryDelta(BaseModel):
    """``b - a`` for each descriptive statistic; None where either side is undefined."""

    model_config = ConfigDict(frozen=True)

    count: int
    mean: float | None = None
    std: float | None = None
    min: float | None = None
    q1: float | None = None
    median: float | None = None
    q3: float | None = None
    max: float | None = None


class MissingDelta(BaseModel):
    """``b - a`` for missing counts and percentages."""

    model_config = ConfigDict(frozen=True)

    missing: int
    pct_missing: float


class ColumnComparison(BaseModel):
    """One shared column, described on both sides."""

    model_config = ConfigDict(frozen=True)

    variable: str
    kind_a: ColumnKind
    kind_b: ColumnKind
    summary_a: DescriptiveSummary | None = None
    summary_b: DescriptiveSummary | None = None
    summary_delta: SummaryDelta | None = None
    missing_a: MissingReport
    missing_b: MissingReport
    missing_delta: MissingDelta


class ComparisonReport(BaseModel):
    """Column-aligned comparison of two datasets."""

    model_config = ConfigDict(frozen=True)

    label_a: str = "A"
    label_b: str = "B"
    shared: list[ColumnComparison] = Field(default_factory=list)
    only_in_a: list[str] = Field(default_factory=list)
    only_in_b: list[str] = Field(default_factory=list)
    errors: list[ColumnError] = Field(default_factory=list)

    @property
    def columns(self) -> list[str]:
        """Report order: shared (A's order), then only-in-A, then only-in-B."""
        return [c.variable for c in self.shared] + self.only_in_a + self.only_in_b

    def get(self, variable: str) -> ColumnComparison:
        for comparison in self.shared:
            if comparison.variable == variable:
                return comparison
        raise KeyError(variable)
