"""Pure numeric correlation algorithms.

Computes Pearson correlations on numpy arrays with pairwise-complete
observations. NaN marks a missing observation inside these arrays.
No models, no logging - just math.
"""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

MIN_PAIRED_OBSERVATIONS = 2


@dataclass(frozen=True)
class PairCorrelation:
    """Result from one pair's correlation computation."""

    col1_idx: int
    col2_idx: int
    r: float | None  # None when undefined
    sample_size: int


def _is_constant(values: np.ndarray) -> bool:
    """All values equal."""
    return bool(values.min() == values.max())


def pearson(x: np.ndarray, y: np.ndarray) -> tuple[float | None, int]:
    """Pearson r over rows where both ``x`` and ``y`` are present.

    Uses the sample (N-1) covariance and standard deviations. Undefined
    (None) with fewer than two paired observations or when either side has
    zero variance over the paired rows.

    Returns:
        (r, number of paired observations)
    """
    mask = ~(np.isnan(x) | np.isnan(y))
    xs = x[mask]
    ys = y[mask]
    n = int(xs.size)
    if n < MIN_PAIRED_OBSERVATIONS:
        return None, n
    if _is_constant(xs) or _is_constant(ys):
        return None, n

    dx = xs - xs.sum() / n
    dy = ys - ys.sum() / n
    var_x = float(np.dot(dx, dx)) / (n - 1)
    var_y = float(np.dot(dy, dy)) / (n - 1)
    if var_x == 0.0 or var_y == 0.0:
        return None, n

    cov = float(np.dot(dx, dy)) / (n - 1)
    r = cov / (math.sqrt(var_x) * math.sqrt(var_y))
    return min(max(r, -1.0), 1.0), n


def self_correlation(x: np.ndarray) -> tuple[float | None, int]:
    """Diagonal entry: 1.0 when the present values have nonzero variance."""
    present = x[~np.isnan(x)]
    n = int(present.size)
    if n < MIN_PAIRED_OBSERVATIONS or _is_constant(present):
        return None, n
    return 1.0, n


def _pair(data: np.ndarray, i: int, j: int) -> PairCorrelation:
    if i == j:
        r, n = self_correlation(data[:, i])
    else:
        r, n = pearson(data[:, i], data[:, j])
    return PairCorrelation(col1_idx=i, col2_idx=j, r=r, sample_size=n)


def compute_pairwise_correlations(
    data: np.ndarray,
    max_workers: int = 1,
) -> list[PairCorrelation]:
    """Correlate every column pair of a 2-D array (upper triangle and diagonal).

    Args:
        data: 2D array where each column is a variable (rows are observations)
        max_workers: Threads used for independent pairs

    Returns:
        PairCorrelation per (i, j) with i <= j, in row-major order
    """
    n_cols = data.shape[1]
    pairs = [(i, j) for i in range(n_cols) for j in range(i, n_cols)]

    if max_workers <= 1 or len(pairs) <= 1:
        return [_pair(data, i, j) for i, j in pairs]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(_pair, data, i, j) for i, j in pairs]
        return [future.result() for future in futures]


def correlation_grid(
    data: np.ndarray,
    max_workers: int = 1,
) -> tuple[list[list[float | None]], list[list[int]]]:
    """Square, symmetric correlation and sample-size grids.

    Computes the upper triangle and mirrors it.
    """
    n_cols = data.shape[1]
    values: list[list[float | None]] = [[None] * n_cols for _ in range(n_cols)]
    sizes = [[0] * n_cols for _ in range(n_cols)]
    for result in compute_pairwise_correlations(data, max_workers):
        i, j = result.col1_idx, result.col2_idx
        values[i][j] = values[j][i] = result.r
        sizes[i][j] = sizes[j][i] = result.sample_size
    return values, sizes
