"""Shared CLI utilities and constants."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console

from statsctl.cli.render import View, to_csv, to_markdown, to_rich
from statsctl.core.config import EngineConfig, get_settings
from statsctl.core.logging import configure_logging, get_logger
from statsctl.core.models.base import ColumnError
from statsctl.sources.csv import RawTable, load_csv, load_stdin

# Load .env file from current directory if present
load_dotenv()

logger = get_logger(__name__)

# Shared console instance
console = Console()
err_console = Console(stderr=True)

# Common type aliases for typer options
FileArg = Annotated[
    Path,
    typer.Argument(
        help="Path to the CSV/TSV file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]

VarsOption = Annotated[
    str | None,
    typer.Option(
        "--vars",
        help="Comma-separated list of column names",
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the report to a file (.md, .json or .csv)",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0, log_format: str | None = None) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=settings default, 1=INFO, 2+=DEBUG
        log_format: "console" or "json" (default from settings)
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    log_format = log_format or settings.log_format
    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def parse_vars(vars_option: str | None) -> list[str] | None:
    """Split ``a, b,c`` into names; None when no selection was given."""
    if vars_option is None:
        return None
    return [name.strip() for name in vars_option.split(",") if name.strip()]


def engine_config(**overrides: Any) -> EngineConfig:
    return EngineConfig.from_settings(**overrides)


def load_table(path: Path | None, stdin: bool = False) -> RawTable:
    """Load a table or exit with status 1."""
    if stdin:
        result = load_stdin()
    elif path is not None:
        result = load_csv(path)
    else:
        err_console.print("[red]Error:[/red] No file specified. Use --stdin to read from stdin.")
        raise typer.Exit(1)

    if not result.success:
        err_console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)
    return result.unwrap()


def print_errors(errors: Sequence[ColumnError]) -> None:
    """Report per-column failures without aborting the command."""
    for error in errors:
        err_console.print(f"[yellow]Warning:[/yellow] {error.message}")


def write_output(views: Sequence[View], payload: Any, output: Path | None) -> None:
    """Print views to the console, or export them by file extension.

    ``.json`` writes ``payload``; ``.csv`` writes the tables as CSV blocks;
    anything else writes Markdown.
    """
    if output is None:
        for view in views:
            console.print(to_rich(view))
        return

    suffix = output.suffix.lower()
    if suffix == ".json":
        content = json.dumps(payload, indent=2)
    elif suffix == ".csv":
        content = to_csv(views)
    else:
        content = to_markdown(views)

    try:
        output.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Cannot write to '{output}': {e}")
        raise typer.Exit(1) from e

    logger.info("report_written", path=str(output), format=suffix.lstrip(".") or "md")
    console.print(f"Output written to: {output}")
