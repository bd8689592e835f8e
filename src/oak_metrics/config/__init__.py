"""Config – exporter settings, env loaders and config errors."""

from oak_metrics.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExporterSettings,
    Settings,
    SettingsLoader,
)
from oak_metrics.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExporterSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
