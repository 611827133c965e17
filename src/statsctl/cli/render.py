"""Presentation of engine results.

Engine models become ``View`` objects (titled tables or preformatted text),
which render to rich tables for the console, or to Markdown / CSV for export.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass, field

from rich.console import Group, RenderableType
from rich.table import Table as RichTable
from rich.text import Text

from statsctl.analysis.comparison import ComparisonReport
from statsctl.analysis.correlation import CorrelationMatrix, CorrelationPair
from statsctl.analysis.missingness import MissingnessResult, MissingReport
from statsctl.analysis.statistics import CategoricalSummary, DescriptiveSummary
from statsctl.analysis.typing import TypeInfo

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class View:
    """A titled table, or a block of preformatted text when ``headers`` is empty."""

    title: str
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    text: str = ""


def format_number(value: float | None) -> str:
    """Two decimals, four for small magnitudes, N/A when undefined."""
    if value is None:
        return NOT_AVAILABLE
    if value != value:  # NaN
        return NOT_AVAILABLE
    if value in (float("inf"), float("-inf")):
        return "Inf" if value > 0 else "-Inf"
    if value == 0.0 or abs(value) >= 1.0:
        return f"{value:.2f}"
    return f"{value:.4f}"


def format_signed(value: float | int | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    text = str(value) if isinstance(value, int) else format_number(value)
    return f"+{text}" if value > 0 else text


# === Views ===


def summary_view(summaries: Sequence[DescriptiveSummary]) -> View:
    return View(
        title="Descriptive Statistics",
        headers=["Variable", "Count", "Mean", "Std", "Min", "Q1", "Median", "Q3", "Max"],
        rows=[
            [
                s.variable,
                str(s.count),
                *(format_number(getattr(s, f)) for f in ("mean", "std", "min", "q1", "median", "q3", "max")),
            ]
            for s in summaries
        ],
    )


def categorical_view(summaries: Sequence[CategoricalSummary]) -> View:
    rows = []
    for s in summaries:
        top = ", ".join(f"{v.value} ({v.count})" for v in s.top_values[:5])
        rows.append([s.variable, s.kind.value, str(s.total), str(s.missing), str(s.unique), top])
    return View(
        title="Categorical Variables",
        headers=["Variable", "Type", "Total", "Missing", "Unique", "Top Values"],
        rows=rows,
    )


def missing_view(reports: Sequence[MissingReport]) -> View:
    return View(
        title="Missing Data",
        headers=["Variable", "Missing", "% Missing"],
        rows=[[r.variable, str(r.missing), f"{r.pct_missing:.2f}%"] for r in reports],
    )


def missing_summary_view(result: MissingnessResult) -> View:
    return View(
        title="",
        text=(
            f"{result.pct_rows_with_any_missing:.2f}% of observations "
            f"({result.rows_with_any_missing} of {result.total_rows}) "
            "have at least one missing value"
        ),
    )


def patterns_view(result: MissingnessResult, limit: int = 10) -> View:
    patterns = [p for p in result.patterns if p.has_missing][:limit]
    return View(
        title="Missing Data Patterns",
        headers=["Missing Columns", "Rows", "% Rows"],
        rows=[[", ".join(p.missing_columns), str(p.count), f"{p.pct:.2f}%"] for p in patterns],
    )


def correlation_view(matrix: CorrelationMatrix) -> View:
    rows = [
        [name, *(format_number(r) for r in matrix.values[i])]
        for i, name in enumerate(matrix.variables)
    ]
    return View(
        title=f"Correlation Matrix ({matrix.method.value.title()})",
        headers=["", *matrix.variables],
        rows=rows,
    )


def high_correlations_view(pairs: Sequence[CorrelationPair], threshold: float) -> View:
    return View(
        title=f"Correlations with |r| >= {threshold:.2f}",
        headers=["Variable 1", "Variable 2", "r", "n"],
        rows=[[p.variable_x, p.variable_y, format_number(p.r), str(p.sample_size)] for p in pairs],
    )


def types_view(infos: Sequence[TypeInfo], show_levels: bool = False) -> View:
    headers = ["Variable", "Type", "Unique", "Missing"]
    if show_levels:
        headers.append("Levels")
    rows = []
    for info in infos:
        row = [info.variable, info.kind.value, str(info.unique_count), str(info.missing)]
        if show_levels:
            row.append(", ".join(info.levels) if info.levels else "-")
        rows.append(row)
    return View(title="Data Types", headers=headers, rows=rows)


def comparison_views(report: ComparisonReport) -> list[View]:
    a, b = report.label_a, report.label_b
    stats_rows = []
    for c in report.shared:
        if c.summary_a is None or c.summary_b is None or c.summary_delta is None:
            continue
        stats_rows.append(
            [
                c.variable,
                str(c.summary_a.count),
                str(c.summary_b.count),
                format_number(c.summary_a.mean),
                format_number(c.summary_b.mean),
                format_signed(c.summary_delta.mean),
                format_number(c.summary_a.std),
                format_number(c.summary_b.std),
            ]
        )
    views = [
        View(
            title=f"Comparison: {a} vs {b}",
            headers=[
                "Variable",
                f"{a} Count",
                f"{b} Count",
                f"{a} Mean",
                f"{b} Mean",
                "Diff Mean",
                f"{a} Std",
                f"{b} Std",
            ],
            rows=stats_rows,
        ),
        View(
            title="Missing Data Comparison",
            headers=["Variable", f"{a} Missing", f"{b} Missing", "Diff"],
            rows=[
                [
                    c.variable,
                    f"{c.missing_a.missing} ({c.missing_a.pct_missing:.1f}%)",
                    f"{c.missing_b.missing} ({c.missing_b.pct_missing:.1f}%)",
                    format_signed(c.missing_delta.missing),
                ]
                for c in report.shared
            ],
        ),
    ]
    if report.only_in_a or report.only_in_b:
        views.append(
            View(
                title="Unmatched Columns",
                headers=["Variable", "Present In"],
                rows=[[name, a] for name in report.only_in_a]
                + [[name, b] for name in report.only_in_b],
            )
        )
    return views


# === Renderers ===


def to_rich(view: View) -> RenderableType:
    if not view.headers:
        text = Text(view.text)
        return Group(Text(view.title, style="bold"), text) if view.title else text

    table = RichTable(title=view.title or None, show_header=True, header_style="bold")
    for i, header in enumerate(view.headers):
        table.add_column(header, justify="left" if i == 0 else "right")
    for row in view.rows:
        table.add_row(*row)
    return table


def _markdown_cell(value: str) -> str:
    return value.replace("|", "\\|")


def to_markdown(views: Sequence[View]) -> str:
    blocks = []
    for view in views:
        lines = [f"## {view.title}", ""] if view.title else []
        if not view.headers:
            lines += ["```", view.text, "```"]
        else:
            lines.append("| " + " | ".join(_markdown_cell(h) for h in view.headers) + " |")
            lines.append("|" + "|".join("---" for _ in view.headers) + "|")
            lines += ["| " + " | ".join(_markdown_cell(c) for c in row) + " |" for row in view.rows]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def to_csv(views: Sequence[View]) -> str:
    """Tables as CSV blocks separated by blank lines; text views are skipped."""
    blocks = []
    for view in views:
        if not view.headers:
            continue
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(view.headers)
        writer.writerows(view.rows)
        blocks.append(buffer.getvalue().rstrip("\n"))
    return "\n\n".join(blocks)
