"""Main CLI application entry point."""

from __future__ import annotations

import typer

from statsctl.cli.commands import compare, correlation, missing, plot, summary, types
from statsctl.cli.common import VerboseOption, setup_logging

app = typer.Typer(
    name="statsctl",
    help="statsctl - descriptive statistics, missing data and correlations for CSV/TSV files.",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VerboseOption = 0) -> None:
    """Statistical exploration of tabular data."""
    setup_logging(verbosity=verbose)


# Register commands
app.command()(summary.summary)
app.command()(missing.missing)
app.command()(correlation.correlation)
app.command()(types.types)
app.command()(compare.compare)
app.command()(plot.plot)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
