"""Correlation analysis models."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from statsctl.core.models.base import ColumnError, CorrelationMethod


class CorrelationPair(BaseModel):
    """Correlation of two distinct variables."""

    model_config = ConfigDict(frozen=True)

    variable_x: str
    variable_y: str
    r: float | None
    sample_size: int


class CorrelationMatrix(BaseModel):
    """Square, symmetric correlation matrix.

    ``values[i][j]`` is the correlation of ``variables[i]`` and
    ``variables[j]``; None means undefined. ``sample_sizes`` holds the number
    of pairwise-complete observations behind each entry.
    """

    model_config = ConfigDict(frozen=True)

    method: CorrelationMethod = CorrelationMethod.PEARSON
    variables: list[str] = Field(default_factory=list)
    values: list[list[float | None]] = Field(default_factory=list)
    sample_sizes: list[list[int]] = Field(default_factory=list)

    def index(self, variable: str) -> int:
        try:
            return self.variables.index(variable)
        except ValueError:
            raise KeyError(variable) from None

    def get(self, x: str, y: str) -> float | None:
        """Correlation of two variables by name."""
        return self.values[self.index(x)][self.index(y)]

    def pairs(self) -> Iterator[CorrelationPair]:
        """Distinct pairs from the upper triangle, row-major."""
        n = len(self.variables)
        for i in range(n):
            for j in range(i + 1, n):
                yield CorrelationPair(
                    variable_x=self.variables[i],
                    variable_y=self.variables[j],
                    r=self.values[i][j],
                    sample_size=self.sample_sizes[i][j],
                )


class CorrelationResult(BaseModel):
    """Correlation matrix plus the requested variables that were excluded."""

    model_config = ConfigDict(frozen=True)

    matrix: CorrelationMatrix
    errors: list[ColumnError] = Field(default_factory=list)
