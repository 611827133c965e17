"""Correlation analysis module.

Pairwise Pearson correlation among Numeric columns using
pairwise-complete observations, plus a threshold view of strong pairs.
"""

from statsctl.analysis.correlation.models import (
    CorrelationMatrix,
    CorrelationPair,
    CorrelationResult,
)
from statsctl.analysis.correlation.processor import (
    correlation_matrix,
    high_correlations,
    to_array,
)

__all__ = [
    # Main entry points
    "correlation_matrix",
    "high_correlations",
    "to_array",
    # Models
    "CorrelationMatrix",
    "CorrelationPair",
    "CorrelationResult",
]
