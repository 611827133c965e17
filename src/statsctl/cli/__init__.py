"""CLI for statsctl.

Usage:
    statsctl summary data.csv --all
    statsctl missing data.csv --patterns
    statsctl correlation data.csv --min 0.7
    statsctl compare before.csv after.csv

Environment:
    Loads .env file from current directory if present.
    Settings are read from STATSCTL_* variables.
"""

from statsctl.cli.main import app, main

__all__ = ["app", "main"]
