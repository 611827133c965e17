"""Core module - configuration, logging, errors and shared models."""

from statsctl.core.config import EngineConfig, Settings, get_settings
from statsctl.core.errors import SchemaError, StatsctlError, TypeMismatchError
from statsctl.core.models.base import (
    ColumnError,
    ColumnKind,
    CorrelationMethod,
    ErrorKind,
    QuantileMethod,
    Result,
)

__all__ = [
    # Config
    "EngineConfig",
    "Settings",
    "get_settings",
    # Errors
    "SchemaError",
    "StatsctlError",
    "TypeMismatchError",
    # Models - enums
    "ColumnKind",
    "CorrelationMethod",
    "ErrorKind",
    "QuantileMethod",
    # Models - base data structures
    "ColumnError",
    "Result",
]
