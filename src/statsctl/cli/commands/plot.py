"""Plot command - terminal histograms, boxplots and scatter plots."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer

from statsctl.analysis.series import paired_values, present_values
from statsctl.analysis.typing import TypedColumn, infer_table
from statsctl.cli import plots
from statsctl.cli.common import (
    FileArg,
    OutputOption,
    VarsOption,
    engine_config,
    err_console,
    load_table,
    parse_vars,
    write_output,
)
from statsctl.cli.render import View
from statsctl.core.errors import SchemaError, StatsctlError


class PlotType(str, Enum):
    HISTOGRAM = "histogram"
    HIST = "hist"
    BOXPLOT = "boxplot"
    BOX = "box"
    SCATTER = "scatter"


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(1)


def _column(columns: list[TypedColumn], name: str) -> TypedColumn:
    for column in columns:
        if column.name == name:
            return column
    raise SchemaError(name)


def plot(
    file: FileArg,
    plot_type: Annotated[
        PlotType,
        typer.Option("--type", "-t", help="Plot type", case_sensitive=False),
    ] = PlotType.HISTOGRAM,
    var: Annotated[
        str | None,
        typer.Option("--var", help="Column to plot (histogram, boxplot)"),
    ] = None,
    vars: VarsOption = None,
    output: OutputOption = None,
) -> None:
    """Draw a plot of numeric columns in the terminal.

    Examples:

        statsctl plot data.csv --var age --type histogram

        statsctl plot data.csv --var income --type box

        statsctl plot data.csv --vars height,weight --type scatter
    """
    table = load_table(file)
    config = engine_config()
    columns = infer_table(table, config)
    names = parse_vars(vars) or []

    try:
        if plot_type is PlotType.SCATTER:
            if len(names) < 2:
                raise _fail("Scatter plot requires two columns: --vars x,y")
            x, y = _column(columns, names[0]), _column(columns, names[1])
            xs, ys = paired_values(x, y)
            text = plots.scatter(x.name, y.name, xs, ys)
        else:
            name = var or (names[0] if names else None)
            if name is None:
                raise _fail("Please specify a column with --var")
            values = present_values(_column(columns, name))
            if plot_type in (PlotType.HISTOGRAM, PlotType.HIST):
                text = plots.histogram(name, values, config)
            else:
                text = plots.boxplot(name, values, config)
    except StatsctlError as e:
        raise _fail(e.message) from e

    write_output([View(title="", text=text)], {"plot": plot_type.value, "text": text}, output)
