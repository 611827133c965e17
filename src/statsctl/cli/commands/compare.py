"""Compare command - statistics of two datasets side by side."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from statsctl.analysis.comparison import compare_tables
from statsctl.cli.common import (
    FileArg,
    OutputOption,
    VarsOption,
    engine_config,
    load_table,
    parse_vars,
    print_errors,
    write_output,
)
from statsctl.cli.render import comparison_views
from statsctl.core.logging import log_context


def compare(
    file1: FileArg,
    file2: Annotated[
        Path,
        typer.Argument(
            help="Path to the second CSV/TSV file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    vars: VarsOption = None,
    output: OutputOption = None,
) -> None:
    """Compare the columns of two datasets.

    Examples:

        statsctl compare before.csv after.csv

        statsctl compare before.csv after.csv --vars price -o diff.md
    """
    table_a = load_table(file1)
    table_b = load_table(file2)
    variables = parse_vars(vars)

    with log_context(command="compare", source=file1.name, other=file2.name):
        report = compare_tables(
            table_a,
            table_b,
            config=engine_config(),
            variables=variables,
            label_a=file1.name,
            label_b=file2.name,
        )
    print_errors(report.errors)

    if variables and not report.columns:
        raise typer.Exit(1)

    write_output(comparison_views(report), report.model_dump(mode="json"), output)
