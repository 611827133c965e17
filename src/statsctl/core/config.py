"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
Engine options for a single invocation live in the immutable EngineConfig.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from statsctl.core.models.base import CorrelationMethod, QuantileMethod

DEFAULT_TRUE_VALUES = frozenset({"true", "yes", "1"})
DEFAULT_FALSE_VALUES = frozenset({"false", "no", "0"})


def _find_config_dir() -> Path:
    """Locate the bundled config directory (null_values.yaml)."""
    # config.py -> core/ -> statsctl/
    return Path(__file__).resolve().parent.parent / "config"


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: STATSCTL_
    """

    model_config = SettingsConfigDict(
        env_prefix="STATSCTL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (null value vocabulary)",
    )

    # Engine
    max_workers: int = Field(
        default=4,
        description="Worker threads for per-column and per-pair computations",
    )
    min_correlation: float = Field(
        default=0.5,
        description="Default |r| threshold for the high-correlation view",
    )
    quantile_method: QuantileMethod = Field(default=QuantileMethod.LINEAR)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class EngineConfig(BaseModel):
    """Immutable options threaded through every engine call.

    Fixed for the lifetime of one invocation; never read from global state
    inside the engine.
    """

    model_config = ConfigDict(frozen=True)

    true_values: frozenset[str] = DEFAULT_TRUE_VALUES
    false_values: frozenset[str] = DEFAULT_FALSE_VALUES
    quantile_method: QuantileMethod = QuantileMethod.LINEAR
    correlation_method: CorrelationMethod = CorrelationMethod.PEARSON
    min_correlation: float = Field(default=0.5, ge=0.0, le=1.0)
    max_workers: int = Field(default=4, ge=1)

    @field_validator("true_values", "false_values", mode="before")
    @classmethod
    def _normalize_vocabulary(cls, value: object) -> frozenset[str]:
        if isinstance(value, str):
            value = [value]
        return frozenset(str(v).strip().lower() for v in value)  # type: ignore[union-attr]

    @property
    def boolean_vocabulary(self) -> frozenset[str]:
        """All strings accepted as booleans (case-normalized)."""
        return self.true_values | self.false_values

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: object) -> EngineConfig:
        """Build engine options from application settings plus overrides."""
        settings = settings or get_settings()
        values: dict[str, object] = {
            "quantile_method": settings.quantile_method,
            "min_correlation": settings.min_correlation,
            "max_workers": settings.max_workers,
        }
        values.update(overrides)
        return cls.model_validate(values)
