"""Unit tests for ExporterSettings and the settings loaders."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import pytest

from oak_metrics.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExporterSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from oak_metrics.kernel.errors import ConstructionError
from oak_metrics.metrics import DEFAULT_BUCKETS, DEFAULT_QUANTILES
from oak_metrics.registry import MetricsStore

_ENV_KEYS = (
    "OAK_UP_METRIC_NAME",
    "OAK_UP_METRIC_HELP",
    "OAK_DEFAULT_BUCKETS",
    "OAK_DEFAULT_QUANTILES",
    "OAK_LOG_LEVEL",
    "OAK_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestExporterSettings:
    def test_defaults(self) -> None:
        settings = ExporterSettings()
        assert settings.up_metric_name == "up"
        assert settings.up_metric_help == "Exporter liveness status"
        assert settings.default_buckets == list(DEFAULT_BUCKETS)
        assert settings.default_quantiles == list(DEFAULT_QUANTILES)
        assert settings.level == logging.INFO
        assert settings.log_json is True

    def test_default_lists_are_independent(self) -> None:
        first, second = ExporterSettings(), ExporterSettings()
        first.default_buckets.append(99.0)
        assert 99.0 not in second.default_buckets

    def test_empty_up_name_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ExporterSettings(up_metric_name=" ")
        assert exc_info.value.setting_name == "up_metric_name"

    def test_duplicate_buckets_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExporterSettings(default_buckets=[1.0, 1.0])

    @pytest.mark.parametrize("buckets", [[1.0, math.inf], [math.nan], [-math.inf, 1.0], [1.0, "2"]])
    def test_non_finite_buckets_rejected_at_construction(self, buckets: list[float]) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ExporterSettings(default_buckets=buckets)
        assert exc_info.value.setting_name == "default_buckets"
        assert exc_info.value.env_key == "OAK_DEFAULT_BUCKETS"
        assert isinstance(exc_info.value.__cause__, ConstructionError)

    def test_valid_buckets_build_histograms(self) -> None:
        store = MetricsStore(ExporterSettings(default_buckets=[0.5, 0.1]))
        histogram = store.observe_histogram("lat", 0.3)
        assert histogram.buckets == (0.1, 0.5, math.inf)

    def test_rejection_names_the_env_variable(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ExporterSettings(log_level="chatty")
        assert exc_info.value.env_key == "OAK_LOG_LEVEL"
        assert "OAK_LOG_LEVEL" in exc_info.value.message

    def test_env_key(self) -> None:
        assert ExporterSettings.env_key("default_buckets") == "OAK_DEFAULT_BUCKETS"

    @pytest.mark.parametrize("quantiles", [[], [1.5], [0.5, 0.5]])
    def test_bad_quantiles_rejected(self, quantiles: list[float]) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExporterSettings(default_quantiles=quantiles)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ExporterSettings(log_level="chatty")

    def test_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            ExporterSettings(log_level="chatty")


class TestEnvSettingsLoader:
    def test_defaults_without_env(self) -> None:
        assert EnvSettingsLoader().load(ExporterSettings) == ExporterSettings()

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAK_UP_METRIC_NAME", "oak_up")
        monkeypatch.setenv("OAK_DEFAULT_BUCKETS", "0.1, 0.5,1")
        monkeypatch.setenv("OAK_DEFAULT_QUANTILES", "0.5,0.99")
        monkeypatch.setenv("OAK_LOG_LEVEL", "debug")
        monkeypatch.setenv("OAK_LOG_JSON", "false")
        settings = EnvSettingsLoader().load(ExporterSettings)
        assert settings.up_metric_name == "oak_up"
        assert settings.default_buckets == [0.1, 0.5, 1.0]
        assert settings.default_quantiles == [0.5, 0.99]
        assert settings.level == logging.DEBUG
        assert settings.log_json is False

    def test_non_numeric_list_is_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAK_DEFAULT_BUCKETS", "0.1,fast")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ExporterSettings)
        assert exc_info.value.setting_name == "default_buckets"
        assert exc_info.value.env_key == "OAK_DEFAULT_BUCKETS"

    def test_semantic_validation_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAK_DEFAULT_QUANTILES", "0.5,2")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ExporterSettings)

    def test_infinite_bucket_fails_at_load(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAK_DEFAULT_BUCKETS", "1,inf")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ExporterSettings)
        assert exc_info.value.env_key == "OAK_DEFAULT_BUCKETS"

    def test_missing_required_field(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import dataclasses

        @dataclasses.dataclass
        class _Required(Settings):
            _prefix = "REQ"
            token: str

        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(_Required)
        assert exc_info.value.setting_name == "token"
        assert exc_info.value.env_key == "REQ_TOKEN"


class TestDotenvSettingsLoader:
    def test_env_file_overrides_when_requested(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("OAK_UP_METRIC_NAME=dotenv_up\nOAK_LOG_JSON=0\n")
        monkeypatch.setenv("OAK_UP_METRIC_NAME", "env_up")
        monkeypatch.setenv("OAK_LOG_JSON", "1")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(ExporterSettings)
        assert settings.up_metric_name == "dotenv_up"
        assert settings.log_json is False

    def test_process_env_wins_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("OAK_UP_METRIC_NAME=dotenv_up\n")
        monkeypatch.setenv("OAK_UP_METRIC_NAME", "env_up")
        settings = DotenvSettingsLoader(str(env_file)).load(ExporterSettings)
        assert settings.up_metric_name == "env_up"
