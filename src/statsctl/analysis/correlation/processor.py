"""Correlation analysis over Numeric TypedColumns.

Orchestrates correlation computation:
1. Resolves the requested numeric columns
2. Stacks them into a 2-D array (NaN for missing)
3. Calls the pure algorithm from algorithms/numeric.py
4. Wraps the grid in a CorrelationMatrix
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from statsctl.analysis.correlation.algorithms import correlation_grid
from statsctl.analysis.correlation.models import (
    CorrelationMatrix,
    CorrelationPair,
    CorrelationResult,
)
from statsctl.analysis.typing.models import TypedColumn
from statsctl.analysis.typing.selection import select_numeric
from statsctl.core.config import EngineConfig
from statsctl.core.logging import get_logger
from statsctl.core.models.base import CorrelationMethod

logger = get_logger(__name__)


def to_array(columns: Sequence[TypedColumn]) -> np.ndarray:
    """Stack Numeric columns as a (rows, columns) float array, NaN for missing."""
    rows = columns[0].row_count if columns else 0
    data = np.full((rows, len(columns)), np.nan, dtype=np.float64)
    for j, column in enumerate(columns):
        data[:, j] = [np.nan if v is None else v for v in column.values]
    return data


def correlation_matrix(
    columns: Sequence[TypedColumn],
    config: EngineConfig | None = None,
    variables: Sequence[str] | None = None,
) -> CorrelationResult:
    """Pairwise Pearson correlation matrix of Numeric columns.

    Each pair uses only the rows where both variables are present. Unknown
    or non-numeric requested variables are reported as errors and left out
    of the matrix.

    Args:
        columns: Inferred columns of one table
        config: Engine options (method, worker count)
        variables: Optional subset of column names, in matrix order

    Returns:
        CorrelationResult with the matrix and per-column errors
    """
    config = config or EngineConfig()
    if config.correlation_method is not CorrelationMethod.PEARSON:
        raise ValueError(f"Unsupported correlation method: {config.correlation_method}")

    numeric, errors = select_numeric(columns, variables)
    values, sizes = correlation_grid(to_array(numeric), max_workers=config.max_workers)

    matrix = CorrelationMatrix(
        method=config.correlation_method,
        variables=[column.name for column in numeric],
        values=values,
        sample_sizes=sizes,
    )
    logger.info(
        "correlation_matrix_computed",
        variables=len(numeric),
        undefined_pairs=sum(1 for pair in matrix.pairs() if pair.r is None),
        failed=len(errors),
    )
    return CorrelationResult(matrix=matrix, errors=errors)


def high_correlations(matrix: CorrelationMatrix, min_abs: float) -> list[CorrelationPair]:
    """Pairs with ``|r| >= min_abs``, strongest first.

    A view over an already-computed matrix; undefined pairs are skipped.
    Ties keep matrix order.
    """
    selected = [pair for pair in matrix.pairs() if pair.r is not None and abs(pair.r) >= min_abs]
    return sorted(selected, key=lambda pair: -abs(pair.r))  # type: ignore[arg-type]
