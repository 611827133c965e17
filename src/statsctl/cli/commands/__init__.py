"""CLI command implementations."""

from statsctl.cli.commands import (
    compare,
    correlation,
    missing,
    plot,
    summary,
    types,
)

__all__ = [
    "compare",
    "correlation",
    "missing",
    "plot",
    "summary",
    "types",
]
