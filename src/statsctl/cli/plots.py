"""Terminal plots for Numeric columns.

Plots consume missing-filtered sequences from ``statsctl.analysis.series``
and reuse the engine's quartiles, so the picture always matches ``summary``.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

import numpy as np

from statsctl.analysis.statistics import describe_values
from statsctl.core.config import EngineConfig

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 15

MIN_BINS = 5
MAX_BAR_HEIGHT = 15
WHISKER_IQR = 1.5


def format_short(value: float) -> str:
    """Compact axis label: 1.2M, 3.4k, 12, 0.5."""
    if abs(value) >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if abs(value) >= 1_000:
        return f"{value / 1_000:.1f}k"
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.1f}"


def bin_count(n: int, width: int = DEFAULT_WIDTH) -> int:
    """Sturges' rule, at least MIN_BINS and at most half the plot width."""
    if n <= 1:
        return 1
    return min(max(math.ceil(math.log2(n)) + 1, MIN_BINS), width // 2)


def bin_values(values: Sequence[float], bins: int) -> tuple[list[int], float, float]:
    """Equal-width bin counts over [min, max].

    Returns:
        (counts, lower edge, bin width); the maximum falls in the last bin
    """
    data = np.asarray(values, dtype=np.float64)
    low = float(data.min())
    spread = float(data.max()) - low
    width = spread / bins if spread > 0 else 1.0
    index = np.minimum(np.floor((data - low) / width).astype(int), bins - 1)
    counts = np.bincount(index, minlength=bins)
    return [int(c) for c in counts], low, width


def histogram(
    variable: str,
    values: Sequence[float],
    config: EngineConfig | None = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> str:
    """Vertical histogram with a mean/median/std footer."""
    if not values:
        return f"{variable}: No valid numeric data"

    summary = describe_values(variable, values, config)
    bins = bin_count(len(values), width)
    counts, low, bin_width = bin_values(values, bins)
    peak = max(counts)
    bar_height = min(height, MAX_BAR_HEIGHT)
    half_step = peak / bar_height / 2

    lines = [f"{variable}: Distribution (n={len(values)})", ""]
    for row in reversed(range(bar_height)):
        threshold = (row + 0.5) / bar_height * peak
        if row == bar_height - 1:
            label = f"{peak:>4}"
        elif row == 0:
            label = f"{0:>4}"
        elif row == bar_height // 2:
            label = f"{peak // 2:>4}"
        else:
            label = " " * 4

        cells = []
        for count in counts:
            if count >= threshold:
                cells.append("██")
            elif count >= threshold - half_step:
                cells.append("▄▄")
            else:
                cells.append("  ")
        lines.append(f"{label}|{''.join(cells)}".rstrip())

    lines.append("    └" + "──" * bins)

    step = max(bins // 5, 1)
    axis = []
    for i in range(bins):
        if i % step == 0:
            label = format_short(low + i * bin_width)
            axis.append(label + " " * max(2 - max(len(label) - 2, 0), 0))
        else:
            axis.append("  ")
    lines.append(("     " + "".join(axis)).rstrip())
    lines.append("")
    lines.append(f"Mean: {summary.mean:.2f} | Median: {summary.median:.2f} | Std: {summary.std:.2f}")
    return "\n".join(lines)


def boxplot(
    variable: str,
    values: Sequence[float],
    config: EngineConfig | None = None,
    width: int = DEFAULT_WIDTH,
) -> str:
    """Horizontal box-and-whisker plot; points beyond 1.5 IQR are drawn as ``o``."""
    if not values:
        return f"{variable}: No valid numeric data"

    summary = describe_values(variable, values, config)
    assert summary.min is not None and summary.max is not None
    assert summary.q1 is not None and summary.median is not None and summary.q3 is not None

    ordered = sorted(values)
    iqr = summary.q3 - summary.q1
    lower_whisker = next(
        (v for v in ordered if v >= summary.q1 - WHISKER_IQR * iqr), summary.min
    )
    upper_whisker = next(
        (v for v in reversed(ordered) if v <= summary.q3 + WHISKER_IQR * iqr), summary.max
    )
    outliers = [v for v in ordered if v < lower_whisker or v > upper_whisker]

    plot_width = max(min(width, 60), 20)
    spread = summary.max - summary.min

    def scale(v: float) -> int:
        if spread == 0:
            return plot_width // 2
        return min(round((v - summary.min) / spread * (plot_width - 1)), plot_width - 1)

    outlier_line = [" "] * plot_width
    for value in outliers:
        outlier_line[scale(value)] = "o"

    box_line = [" "] * plot_width
    lw, uq1, um, uq3, uw = (
        scale(v) for v in (lower_whisker, summary.q1, summary.median, summary.q3, upper_whisker)
    )
    for i in range(lw, uw + 1):
        box_line[i] = "─"
    for i in range(uq1, uq3 + 1):
        box_line[i] = "█"
    box_line[um] = "│"
    box_line[lw] = "├"
    box_line[uw] = "┤"

    low_label = format_short(summary.min)
    high_label = format_short(summary.max)
    lines = [
        f"{variable}: Boxplot (n={len(values)})",
        "",
        ("  " + "".join(outlier_line)).rstrip(),
        ("  " + "".join(box_line)).rstrip(),
        "  " + "─" * plot_width,
        f"  {low_label:<{max(plot_width - len(high_label), 0)}}{high_label}",
        "",
        f"Min: {summary.min:.2f} | Q1: {summary.q1:.2f} | Median: {summary.median:.2f} "
        f"| Q3: {summary.q3:.2f} | Max: {summary.max:.2f}",
    ]
    if outliers:
        lines.append(f"Outliers: {len(outliers)} values")
    return "\n".join(lines)


def _density_glyph(count: int) -> str:
    if count > 3:
        return "●"
    if count > 1:
        return "◦"
    return "·"


def scatter(
    x_name: str,
    y_name: str,
    xs: Sequence[float],
    ys: Sequence[float],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> str:
    """Scatter plot of paired values; glyphs grow with points per cell."""
    if not xs:
        return f"{x_name} vs {y_name}: No complete pairs of data"

    plot_w = max(min(width, 60), 20)
    plot_h = max(min(height, 20), 8)
    x_min, x_max = min(xs), max(xs)
    y_min, y_max = min(ys), max(ys)
    x_range = x_max - x_min or 1.0
    y_range = y_max - y_min or 1.0

    density: Counter[tuple[int, int]] = Counter()
    for x, y in zip(xs, ys, strict=True):
        col = min(round((x - x_min) / x_range * (plot_w - 1)), plot_w - 1)
        row = min(round((y_max - y) / y_range * (plot_h - 1)), plot_h - 1)
        density[(row, col)] += 1

    grid = [[" "] * plot_w for _ in range(plot_h)]
    for (row, col), count in density.items():
        grid[row][col] = _density_glyph(count)

    lines = [f"{y_name} vs {x_name} (n={len(xs)})", ""]
    for i, row in enumerate(grid):
        if i in (0, plot_h - 1, plot_h // 2):
            y_value = y_max - i / (plot_h - 1) * y_range
            prefix = f"{y_value:>8.1f}│"
        else:
            prefix = " " * 8 + "│"
        lines.append((prefix + "".join(row)).rstrip())

    high_label = f"{x_max:.1f}"
    lines.append(" " * 8 + "└" + "─" * plot_w)
    lines.append(f"{' ' * 9}{f'{x_min:.1f}':<{max(plot_w - len(high_label), 0)}}{high_label}")
    lines.append(f"{' ' * 9}{x_name:^{plot_w}}".rstrip())
    return "\n".join(lines)
