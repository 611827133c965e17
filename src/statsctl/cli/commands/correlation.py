"""Correlation command - Pearson correlation matrix."""

from __future__ import annotations

from typing import Annotated

import typer

from statsctl.analysis.correlation import correlation_matrix, high_correlations
from statsctl.analysis.typing import infer_table
from statsctl.cli.common import (
    FileArg,
    OutputOption,
    VarsOption,
    engine_config,
    err_console,
    load_table,
    parse_vars,
    print_errors,
    write_output,
)
from statsctl.cli.render import correlation_view, high_correlations_view
from statsctl.core.logging import log_context


def correlation(
    file: FileArg,
    vars: VarsOption = None,
    min_correlation: Annotated[
        float | None,
        typer.Option(
            "--min",
            min=0.0,
            max=1.0,
            help="Threshold on |r| for the strong-pairs table (default from settings)",
        ),
    ] = None,
    output: OutputOption = None,
) -> None:
    """Show the correlation matrix of numeric columns.

    Examples:

        statsctl correlation data.csv

        statsctl correlation data.csv --vars height,weight,age --min 0.7
    """
    table = load_table(file)
    overrides = {} if min_correlation is None else {"min_correlation": min_correlation}
    config = engine_config(**overrides)

    with log_context(command="correlation", source=str(file)):
        columns = infer_table(table, config)
        result = correlation_matrix(columns, config, parse_vars(vars))
    print_errors(result.errors)

    if not result.matrix.variables:
        err_console.print("[red]Error:[/red] No numeric columns found for correlation analysis.")
        raise typer.Exit(1)

    strong = high_correlations(result.matrix, config.min_correlation)
    payload = {
        "matrix": result.matrix.model_dump(mode="json"),
        "high_correlations": [p.model_dump(mode="json") for p in strong],
        "min_correlation": config.min_correlation,
        "errors": [e.model_dump(mode="json") for e in result.errors],
    }
    write_output(
        [correlation_view(result.matrix), high_correlations_view(strong, config.min_correlation)],
        payload,
        output,
    )
