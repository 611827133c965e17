"""Pure descriptive-statistics algorithms.

These functions operate on 1-D float64 numpy arrays of present values and
return plain floats. ``None`` stands for "undefined" (no observations).
No missing-value handling here - callers pass already-filtered values.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from statsctl.core.models.base import QuantileMethod

QUARTILES = (0.25, 0.5, 0.75)


def as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def mean(values: np.ndarray) -> float | None:
    """Arithmetic mean, undefined for an empty array."""
    if values.size == 0:
        return None
    return float(values.sum() / values.size)


def sample_variance(values: np.ndarray, center: float | None = None) -> float | None:
    """Sample variance with Bessel's correction (N-1 denominator).

    A single observation or a constant array has variance 0 (exactly, even
    when the mean is not representable); an empty array is undefined.
    The result is clamped at 0 so the square root is always defined.
    """
    n = values.size
    if n == 0:
        return None
    if n == 1:
        return 0.0
    if values.min() == values.max():
        return 0.0
    if center is None:
        center = float(values.sum() / n)
    deviations = values - center
    return max(float(np.dot(deviations, deviations)) / (n - 1), 0.0)


def sample_std(values: np.ndarray, center: float | None = None) -> float | None:
    variance = sample_variance(values, center)
    return None if variance is None else math.sqrt(variance)


def sort_values(values: np.ndarray) -> np.ndarray:
    """Stable ascending sort. Values must not contain NaN."""
    return np.sort(values, kind="stable")


def quantile(
    sorted_values: np.ndarray,
    p: float,
    method: QuantileMethod = QuantileMethod.LINEAR,
) -> float | None:
    """Quantile ``p`` of an ascending array.

    The rank of ``p`` is ``p * (n - 1)`` on the 0-indexed order statistics.
    LINEAR interpolates between the floor and ceil order statistics; the
    other methods pick or average them instead.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Quantile must be in [0, 1], got {p}")
    n = sorted_values.size
    if n == 0:
        return None

    rank = p * (n - 1)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    lo = float(sorted_values[lower])
    hi = float(sorted_values[upper])

    if method is QuantileMethod.LOWER:
        return lo
    if method is QuantileMethod.HIGHER:
        return hi
    if method is QuantileMethod.NEAREST:
        return float(sorted_values[round(rank)])
    if method is QuantileMethod.MIDPOINT:
        return lo if lower == upper else (lo + hi) / 2.0

    if lower == upper:
        return lo
    fraction = rank - lower
    # Keep the result inside [lo, hi] under rounding
    return min(max(lo + (hi - lo) * fraction, lo), hi)


def quantiles(
    sorted_values: np.ndarray,
    probabilities: Sequence[float] = QUARTILES,
    method: QuantileMethod = QuantileMethod.LINEAR,
) -> list[float | None]:
    """Several quantiles with one interpolation method."""
    return [quantile(sorted_values, p, method) for p in probabilities]
