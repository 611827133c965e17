"""CSV/TSV source loader - every cell read as text."""

from statsctl.sources.csv.loader import detect_delimiter, load_csv, load_stdin, load_text
from statsctl.sources.csv.models import RawTable
from statsctl.sources.csv.null_values import NullValueConfig, load_null_value_config

__all__ = [
    "RawTable",
    "NullValueConfig",
    "detect_delimiter",
    "load_csv",
    "load_null_value_config",
    "load_stdin",
    "load_text",
]
