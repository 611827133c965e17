"""Null value configuration loader."""

from pathlib import Path
from typing import Any

import yaml

from statsctl.core.config import get_settings


class NullValueConfig:
    """Strings that mark a cell as missing."""

    def __init__(self, config_dict: dict[str, Any]):
        self._config = config_dict
        self._null_strings = frozenset(self.get_null_strings())

    def get_null_strings(self, include_placeholders: bool = True) -> list[str]:
        """Get list of strings to treat as missing.

        Args:
            include_placeholders: Whether to include placeholder nulls (".", "-")

        Returns:
            List of null string representations
        """
        null_strings = []

        for item in self._config.get("standard_nulls", []):
            null_strings.append(item["value"])

        for item in self._config.get("spreadsheet_nulls", []):
            null_strings.append(item["value"])

        if include_placeholders:
            for item in self._config.get("placeholder_nulls", []):
                null_strings.append(item["value"])

        return null_strings

    def should_trim_whitespace(self) -> bool:
        """Check if whitespace should be trimmed before null checking."""
        result = self._config.get("whitespace_rules", {}).get("trim_before_check", True)
        return bool(result)

    def treat_whitespace_as_null(self) -> bool:
        """Check if whitespace-only strings should be treated as missing."""
        result = self._config.get("whitespace_rules", {}).get("treat_whitespace_only_as_null", True)
        return bool(result)

    def is_missing(self, value: str | None) -> bool:
        """True if the raw cell represents a missing value."""
        if value is None:
            return True
        if self.treat_whitespace_as_null() and not value.strip():
            return True
        if self.should_trim_whitespace():
            value = value.strip()
        return value in self._null_strings

    def normalize(self, value: str | None) -> str | None:
        """Map a raw cell to its trimmed text, or None when missing."""
        if self.is_missing(value):
            return None
        assert value is not None
        return value.strip() if self.should_trim_whitespace() else value


def load_null_value_config(config_path: Path | None = None) -> NullValueConfig:
    """Load null value configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        NullValueConfig instance
    """
    if config_path is None:
        settings = get_settings()
        config_path = settings.config_path / "null_values.yaml"

    with open(config_path) as f:
        config_dict = yaml.safe_load(f)

    return NullValueConfig(config_dict or {})
