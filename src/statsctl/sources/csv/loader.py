"""CSV/TSV loader - untyped source read as text.

Every cell is read as VARCHAR so nothing is lost before type inference;
missing-value strings are resolved here, once, into ``None``.
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

import duckdb

from statsctl.core.logging import get_logger
from statsctl.core.models.base import Result
from statsctl.sources.csv.models import RawTable
from statsctl.sources.csv.null_values import NullValueConfig, load_null_value_config

logger = get_logger(__name__)


def detect_delimiter(first_line: str) -> str:
    """Tab if the header line has more tabs than commas, else comma."""
    if first_line.count("\t") > first_line.count(","):
        return "\t"
    return ","


def _first_line(path: Path) -> str:
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.readline()


def load_csv(
    path: str | Path,
    null_config: NullValueConfig | None = None,
) -> Result[RawTable]:
    """Load a CSV or TSV file into a RawTable.

    Args:
        path: File to read
        null_config: Missing-value vocabulary (default: bundled null_values.yaml)

    Returns:
        Result containing the RawTable
    """
    path = Path(path)
    if not path.exists():
        return Result.fail(f"Cannot open file '{path}': not found")
    if not path.is_file():
        return Result.fail(f"Cannot open file '{path}': not a file")

    try:
        header = _first_line(path)
    except OSError as e:
        return Result.fail(f"Cannot open file '{path}': {e}")

    if not header.strip():
        return Result.fail(f"File '{path}' is empty")

    null_config = null_config or load_null_value_config()
    delimiter = detect_delimiter(header)
    escaped_path = str(path).replace("'", "''")

    conn = duckdb.connect(":memory:")
    try:
        relation = conn.execute(f"""
            SELECT * FROM read_csv(
                '{escaped_path}',
                header = true,
                delim = '{delimiter}',
                all_varchar = true,
                null_padding = true
            )
        """)
        names = [desc[0].strip() for desc in relation.description]
        rows = relation.fetchall()
    except duckdb.Error as e:
        return Result.fail(f"Failed to parse '{path}': {e}")
    finally:
        conn.close()

    if not names:
        return Result.fail(f"No columns found in '{path}'")

    rows = [[null_config.normalize(cell) for cell in row] for row in rows]
    try:
        table = RawTable.from_rows(names, rows)
    except ValueError as e:
        return Result.fail(f"Failed to parse '{path}': {e}")

    logger.debug(
        "csv_loaded",
        path=str(path),
        delimiter="tab" if delimiter == "\t" else "comma",
        rows=table.row_count,
        columns=table.column_count,
    )
    return Result.ok(table)


def load_text(text: str, null_config: NullValueConfig | None = None) -> Result[RawTable]:
    """Load CSV/TSV content held in memory."""
    if not text.strip():
        return Result.fail("Input data is empty")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "input.csv"
        path.write_text(text, encoding="utf-8")
        return load_csv(path, null_config)


def load_stdin(null_config: NullValueConfig | None = None) -> Result[RawTable]:
    """Load CSV/TSV content piped on stdin."""
    text = sys.stdin.read()
    if not text.strip():
        return Result.fail("No data received from stdin")
    return load_text(text, null_config)
