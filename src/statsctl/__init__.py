"""statsctl - quick statistical analysis of CSV/TSV data.

Type inference, descriptive statistics, missingness, correlation and
dataset comparison over in-memory tabular data.
"""

__version__ = "0.1.0"

from statsctl.core.models.base import Result

__all__ = [
    "Result",
    "__version__",
]
