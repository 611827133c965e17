"""Summary command - descriptive statistics per column."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from statsctl.analysis.statistics import describe_columns, summarize_categoricals
from statsctl.analysis.typing import infer_table
from statsctl.cli.common import (
    OutputOption,
    VarsOption,
    engine_config,
    load_table,
    parse_vars,
    print_errors,
    write_output,
)
from statsctl.cli.render import View, categorical_view, summary_view
from statsctl.core.logging import log_context
from statsctl.core.models.base import ErrorKind


def summary(
    file: Annotated[
        Path | None,
        typer.Argument(help="Path to the CSV/TSV file", dir_okay=False),
    ] = None,
    vars: VarsOption = None,
    all_columns: Annotated[
        bool,
        typer.Option("--all", help="Also summarize Boolean and Categorical columns"),
    ] = False,
    output: OutputOption = None,
    stdin: Annotated[
        bool,
        typer.Option("--stdin", help="Read data from stdin instead of a file"),
    ] = False,
) -> None:
    """Show descriptive statistics for numeric columns.

    Examples:

        statsctl summary data.csv

        statsctl summary data.csv --vars age,income --all

        cat data.csv | statsctl summary --stdin
    """
    table = load_table(file, stdin=stdin)
    config = engine_config()
    variables = parse_vars(vars)

    with log_context(command="summary", source=str(file) if file else "stdin"):
        columns = infer_table(table, config)
        described = describe_columns(columns, config, variables)
        categorical = summarize_categoricals(columns, variables) if all_columns else []

    # Non-numeric columns shown in the categorical table are not failures
    covered = {c.variable for c in categorical}
    errors = [
        e
        for e in described.errors
        if not (e.error is ErrorKind.TYPE_MISMATCH and e.variable in covered)
    ]
    print_errors(errors)

    views: list[View] = []
    payload: dict[str, object] = {
        "summaries": [s.model_dump(mode="json") for s in described.summaries],
        "errors": [e.model_dump(mode="json") for e in errors],
    }
    if described.summaries:
        views.append(summary_view(described.summaries))

    if all_columns:
        payload["categorical"] = [c.model_dump(mode="json") for c in categorical]
        if categorical:
            views.append(categorical_view(categorical))

    if not views:
        if variables and errors:
            raise typer.Exit(1)
        views.append(View(title="", text="No numeric columns found in the dataset."))

    write_output(views, payload, output)
