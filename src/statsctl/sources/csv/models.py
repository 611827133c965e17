"""RawTable - the loader's output and the engine's input."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

Cell = str | None


@dataclass(frozen=True)
class RawTable:
    """Column-major table of raw text cells.

    ``None`` is the explicit missing marker; every other cell is a string.
    Column names are unique and non-empty, and every column has the same
    number of cells.
    """

    names: tuple[str, ...]
    columns: tuple[tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        if len(self.names) != len(self.columns):
            raise ValueError(
                f"{len(self.names)} column names for {len(self.columns)} columns"
            )
        seen: set[str] = set()
        for name in self.names:
            if not name:
                raise ValueError("Column names must be non-empty")
            if name in seen:
                raise ValueError(f"Duplicate column name: {name}")
            seen.add(name)
        lengths = {len(column) for column in self.columns}
        if len(lengths) > 1:
            raise ValueError(f"Columns have different lengths: {sorted(lengths)}")

    @classmethod
    def from_columns(cls, data: Mapping[str, Sequence[Cell]]) -> RawTable:
        """Build from an ordered name -> cells mapping."""
        return cls(
            names=tuple(data),
            columns=tuple(tuple(cells) for cells in data.values()),
        )

    @classmethod
    def from_rows(cls, names: Sequence[str], rows: Sequence[Sequence[Cell]]) -> RawTable:
        """Build from row-major data, rejecting rows of the wrong arity."""
        width = len(names)
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {index + 1} has {len(row)} cells, expected {width}")
        columns = tuple(tuple(row[i] for row in rows) for i in range(width))
        return cls(names=tuple(names), columns=columns)

    @property
    def row_count(self) -> int:
        return len(self.columns[0]) if self.columns else 0

    @property
    def column_count(self) -> int:
        return len(self.names)

    def has_column(self, name: str) -> bool:
        return name in self.names

    def column(self, name: str) -> tuple[Cell, ...]:
        """Cells of one column.

        Raises:
            KeyError: If the column does not exist
        """
        try:
            return self.columns[self.names.index(name)]
        except ValueError:
            raise KeyError(name) from None

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Iterate row-major."""
        return zip(*self.columns, strict=True)

    def select(self, names: Sequence[str]) -> RawTable:
        """Project onto the given columns, in the given order (unknown names skipped)."""
        kept = [name for name in names if name in self.names]
        return RawTable(names=tuple(kept), columns=tuple(self.column(n) for n in kept))
