"""Missing-value analysis models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MissingReport(BaseModel):
    """Missing-value count of one column."""

    model_config = ConfigDict(frozen=True)

    variable: str
    missing: int
    pct_missing: float


class MissingPattern(BaseModel):
    """Rows sharing the same set of absent columns.

    An empty ``missing_columns`` list is the fully-present pattern.
    """

    model_config = ConfigDict(frozen=True)

    missing_columns: list[str]
    count: int
    pct: float

    @property
    def has_missing(self) -> bool:
        return bool(self.missing_columns)


class MissingnessResult(BaseModel):
    """Per-column missing reports plus joint measures across columns."""

    model_config = ConfigDict(frozen=True)

    reports: list[MissingReport] = Field(default_factory=list)
    total_rows: int
    rows_with_any_missing: int
    pct_rows_with_any_missing: float
    patterns: list[MissingPattern] = Field(default_factory=list)
