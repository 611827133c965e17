"""Missing command - missing-value counts and patterns."""

from __future__ import annotations

from typing import Annotated

import typer

from statsctl.analysis.missingness import analyze_table_missingness, only_missing
from statsctl.cli.common import FileArg, OutputOption, load_table, write_output
from statsctl.cli.render import View, missing_summary_view, missing_view, patterns_view


def missing(
    file: FileArg,
    only_missing_flag: Annotated[
        bool,
        typer.Option("--only-missing", help="Only list columns with missing values"),
    ] = False,
    patterns: Annotated[
        bool,
        typer.Option("--patterns", help="Show which columns tend to be missing together"),
    ] = False,
    output: OutputOption = None,
) -> None:
    """Show missing-value counts per column.

    Examples:

        statsctl missing data.csv

        statsctl missing data.csv --only-missing --patterns
    """
    table = load_table(file)
    result = analyze_table_missingness(table, patterns=patterns)

    reports = only_missing(result.reports) if only_missing_flag else result.reports
    views: list[View] = []
    if reports:
        views.append(missing_view(reports))
    else:
        views.append(View(title="", text="No missing data found."))

    if patterns and result.rows_with_any_missing:
        views.append(patterns_view(result))
    if result.rows_with_any_missing:
        views.append(missing_summary_view(result))

    payload = result.model_dump(mode="json")
    payload["reports"] = [r.model_dump(mode="json") for r in reports]
    write_output(views, payload, output)
