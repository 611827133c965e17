"""Shared pytest fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from statsctl.analysis.typing import TypedColumn, infer_table
from statsctl.core.config import EngineConfig
from statsctl.core.logging import configure_logging
from statsctl.sources.csv import RawTable

PEOPLE_CSV = """id,age,income,member,city
1,30,50000,yes,Paris
2,,62000,no,Lyon
3,40,NA,yes,Paris
4,50,58000,,Nice
"""


@pytest.fixture(autouse=True)
def _reset_logging():
    """Restore quiet logging after tests that raise verbosity."""
    yield
    configure_logging()


@pytest.fixture
def config() -> EngineConfig:
    """Engine options with a small worker pool."""
    return EngineConfig(max_workers=2)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write text to a file under tmp_path and return its path."""

    def _write(content: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def people_csv(write_csv) -> Path:
    return write_csv(PEOPLE_CSV, "people.csv")


@pytest.fixture
def people_table() -> RawTable:
    return RawTable.from_columns(
        {
            "id": ["1", "2", "3", "4"],
            "age": ["30", None, "40", "50"],
            "income": ["50000", "62000", None, "58000"],
            "member": ["yes", "no", "yes", None],
            "city": ["Paris", "Lyon", "Paris", "Nice"],
        }
    )


@pytest.fixture
def people_columns(people_table: RawTable, config: EngineConfig) -> list[TypedColumn]:
    return infer_table(people_table, config)
