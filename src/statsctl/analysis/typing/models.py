"""Type inference models.

- TypedColumn: a column's values after inference (engine data holder)
- TypeInfo: per-column view for the ``types`` command
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from statsctl.core.errors import TypeMismatchError
from statsctl.core.models.base import ColumnKind

# Closed union of inferred cell values: the column kind fixes the member.
Value = float | bool | str


@dataclass(frozen=True)
class TypedColumn:
    """A single column's values plus its inferred kind.

    Read-only once constructed, so it can be shared across worker threads.
    ``values`` keeps row order; ``None`` marks a missing cell.
    """

    name: str
    kind: ColumnKind
    values: tuple[Value | None, ...]
    missing_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "missing_count", sum(1 for v in self.values if v is None))

    @property
    def row_count(self) -> int:
        return len(self.values)

    @property
    def present_count(self) -> int:
        return len(self.values) - self.missing_count

    @property
    def is_numeric(self) -> bool:
        return self.kind is ColumnKind.NUMERIC

    def is_present(self, index: int) -> bool:
        return self.values[index] is not None

    def present_values(self) -> tuple[Value, ...]:
        """Present values in row order."""
        return tuple(v for v in self.values if v is not None)

    def numeric_values(self) -> tuple[float, ...]:
        """Present values of a Numeric column, missing-filtered, in row order.

        Raises:
            TypeMismatchError: If the column is not Numeric
        """
        if not self.is_numeric:
            raise TypeMismatchError(self.name, self.kind)
        return tuple(v for v in self.values if v is not None)  # type: ignore[misc]

    def levels(self) -> list[Value]:
        """Sorted distinct present values (Boolean and Categorical columns)."""
        return sorted(set(self.present_values()))  # type: ignore[type-var]


class TypeInfo(BaseModel):
    """Inferred type summary of one column."""

    model_config = ConfigDict(frozen=True)

    variable: str
    kind: ColumnKind
    unique_count: int
    missing: int
    levels: list[str] = Field(default_factory=list)
