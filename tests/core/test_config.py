"""Tests for settings and engine configuration."""

import pytest
from pydantic import ValidationError

from statsctl.core.config import EngineConfig, Settings
from statsctl.core.errors import SchemaError, TypeMismatchError
from statsctl.core.models.base import ColumnKind, ErrorKind, QuantileMethod, Result


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STATSCTL_MAX_WORKERS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.max_workers == 4
        assert settings.min_correlation == 0.5
        assert settings.quantile_method is QuantileMethod.LINEAR
        assert (settings.config_path / "null_values.yaml").exists()

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("STATSCTL_MAX_WORKERS", "8")
        monkeypatch.setenv("STATSCTL_QUANTILE_METHOD", "midpoint")

        settings = Settings(_env_file=None)

        assert settings.max_workers == 8
        assert settings.quantile_method is QuantileMethod.MIDPOINT


class TestEngineConfig:
    """Tests for the immutable per-invocation options."""

    def test_default_boolean_vocabulary(self):
        config = EngineConfig()

        assert config.true_values == {"true", "yes", "1"}
        assert config.false_values == {"false", "no", "0"}
        assert config.boolean_vocabulary == {"true", "yes", "1", "false", "no", "0"}

    def test_vocabulary_is_lowercased(self):
        config = EngineConfig(true_values=["Y", " TRUE "], false_values=["N"])

        assert config.true_values == {"y", "true"}
        assert config.false_values == {"n"}

    def test_frozen(self):
        config = EngineConfig()

        with pytest.raises(ValidationError):
            config.max_workers = 10

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_rejects_threshold_outside_unit_interval(self, threshold):
        with pytest.raises(ValidationError):
            EngineConfig(min_correlation=threshold)

    def test_from_settings_applies_overrides(self):
        settings = Settings(_env_file=None, max_workers=3, min_correlation=0.4)

        config = EngineConfig.from_settings(settings, min_correlation=0.9)

        assert config.max_workers == 3
        assert config.min_correlation == 0.9


class TestErrors:
    """Tests for engine exceptions and their data form."""

    def test_schema_error_names_column(self):
        error = SchemaError("age")

        assert error.variable == "age"
        assert "age" in str(error)
        assert error.to_column_error().error is ErrorKind.SCHEMA

    def test_type_mismatch_carries_kind(self):
        error = TypeMismatchError("city", ColumnKind.CATEGORICAL)
        column_error = error.to_column_error()

        assert column_error.error is ErrorKind.TYPE_MISMATCH
        assert column_error.kind is ColumnKind.CATEGORICAL
        assert "Categorical" in column_error.message


class TestResult:
    """Tests for the Result wrapper."""

    def test_ok_unwraps(self):
        assert Result.ok(3).unwrap() == 3

    def test_fail_raises_on_unwrap(self):
        result = Result.fail("boom")

        assert not result.success
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()

    def test_loader_surface_only(self):
        assert not hasattr(Result, "map")
