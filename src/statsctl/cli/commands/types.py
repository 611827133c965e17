"""Types command - inferred column kinds."""

from __future__ import annotations

from typing import Annotated

import typer

from statsctl.analysis.typing import describe_types, infer_table
from statsctl.cli.common import FileArg, engine_config, load_table, write_output
from statsctl.cli.render import types_view


def types(
    file: FileArg,
    show_levels: Annotated[
        bool,
        typer.Option("--show-levels", help="List the distinct values of non-numeric columns"),
    ] = False,
) -> None:
    """Show the inferred type of each column.

    Examples:

        statsctl types data.csv --show-levels
    """
    table = load_table(file)
    infos = describe_types(infer_table(table, engine_config()))
    write_output([types_view(infos, show_levels)], [i.model_dump(mode="json") for i in infos], None)
