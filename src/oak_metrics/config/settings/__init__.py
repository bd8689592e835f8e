"""Config settings – 12-factor env-based configuration."""
from oak_metrics.config.settings.base import Settings
from oak_metrics.config.settings.exporter import ExporterSettings
from oak_metrics.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExporterSettings",
    "Settings",
    "SettingsLoader",
]
