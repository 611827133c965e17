"""Pure correlation algorithms.

These functions operate on numpy arrays and return plain dataclasses.
No logging, no Pydantic models - just math.
"""

from statsctl.analysis.correlation.algorithms.numeric import (
    MIN_PAIRED_OBSERVATIONS,
    PairCorrelation,
    compute_pairwise_correlations,
    correlation_grid,
    pearson,
    self_correlation,
)

__all__ = [
    "MIN_PAIRED_OBSERVATIONS",
    "PairCorrelation",
    "compute_pairwise_correlations",
    "correlation_grid",
    "pearson",
    "self_correlation",
]
