"""Type inference over raw text cells.

Classifies each column once as Numeric, Boolean or Categorical and converts
its cells into the matching Value member. Inference never fails: every
column, however degenerate, yields a well-formed TypedColumn.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from statsctl.analysis.typing.models import TypedColumn, TypeInfo, Value
from statsctl.core.config import EngineConfig
from statsctl.core.logging import get_logger
from statsctl.core.models.base import ColumnKind
from statsctl.sources.csv.models import Cell, RawTable

logger = get_logger(__name__)

# Optional sign, digits with optional decimal point (or a leading point), optional exponent.
NUMERIC_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

DEFAULT_MAX_LEVELS = 20


def is_numeric_literal(value: str) -> bool:
    """True if the string is a plain decimal/scientific number."""
    return NUMERIC_PATTERN.match(value) is not None


def classify(present: Sequence[str], config: EngineConfig) -> ColumnKind:
    """Pick the kind for a column's present (non-missing) values."""
    if not present:
        return ColumnKind.CATEGORICAL

    if all(is_numeric_literal(v) for v in present):
        return ColumnKind.NUMERIC

    distinct = {v.lower() for v in present}
    if len(distinct) <= 2 and distinct <= config.boolean_vocabulary:
        return ColumnKind.BOOLEAN

    return ColumnKind.CATEGORICAL


def infer_column(
    name: str,
    cells: Sequence[Cell],
    config: EngineConfig | None = None,
) -> TypedColumn:
    """Infer a column's kind and convert its cells.

    Args:
        name: Column name
        cells: Raw cells, ``None`` for missing
        config: Engine options (boolean vocabulary)

    Returns:
        TypedColumn with one value (or None) per input cell
    """
    config = config or EngineConfig()
    present = [c for c in cells if c is not None]
    kind = classify(present, config)

    values: tuple[Value | None, ...]
    if kind is ColumnKind.NUMERIC:
        values = tuple(None if c is None else float(c) for c in cells)
    elif kind is ColumnKind.BOOLEAN:
        values = tuple(None if c is None else c.lower() in config.true_values for c in cells)
    else:
        values = tuple(cells)

    return TypedColumn(name=name, kind=kind, values=values)


def infer_table(
    table: RawTable,
    config: EngineConfig | None = None,
) -> list[TypedColumn]:
    """Infer every column of a table, preserving column order."""
    config = config or EngineConfig()
    columns = [
        infer_column(name, cells, config)
        for name, cells in zip(table.names, table.columns, strict=True)
    ]
    logger.debug(
        "types_inferred",
        columns=len(columns),
        numeric=sum(1 for c in columns if c.kind is ColumnKind.NUMERIC),
        boolean=sum(1 for c in columns if c.kind is ColumnKind.BOOLEAN),
        categorical=sum(1 for c in columns if c.kind is ColumnKind.CATEGORICAL),
    )
    return columns


def describe_types(
    columns: Sequence[TypedColumn],
    max_levels: int = DEFAULT_MAX_LEVELS,
) -> list[TypeInfo]:
    """Summarize inferred kinds and levels for display."""
    infos = []
    for column in columns:
        distinct = column.levels()
        if column.kind is ColumnKind.NUMERIC:
            levels: list[str] = []
        elif len(distinct) <= max_levels:
            levels = [str(v) for v in distinct]
        else:
            levels = [f"({len(distinct)} unique)"]

        infos.append(
            TypeInfo(
                variable=column.name,
                kind=column.kind,
                unique_count=len(distinct),
                missing=column.missing_count,
                levels=levels,
            )
        )
    return infos
