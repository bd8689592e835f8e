"""Config validation errors."""
from __future__ import annotations

from oak_metrics.kernel.errors import OakMetricsError


class ConfigError(OakMetricsError):
    """Raised when exporter configuration is invalid or could not be loaded."""

    code = "config_error"

    @property
    def setting_name(self) -> str | None:
        return self.detail.get("setting")

    @property
    def env_key(self) -> str | None:
        return self.detail.get("env_key")


class MissingRequiredSettingError(ConfigError):
    """A settings field without default has no environment variable."""

    code = "missing_required_setting"

    def __init__(self, setting_name: str, env_key: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing (set {env_key})",
            setting=setting_name,
            env_key=env_key,
        )


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be coerced or fails validation.

    *env_key* is the variable the value came from, or the one that would
    override it when the value was passed in code.
    """

    code = "invalid_setting_value"

    def __init__(
        self, setting_name: str, value: object, reason: str, *, env_key: str | None = None
    ) -> None:
        where = f" ({env_key})" if env_key else ""
        super().__init__(
            f"Setting '{setting_name}'{where} has invalid value {value!r}: {reason}",
            setting=setting_name,
            env_key=env_key,
            reason=reason,
        )
        self.value = value

    @property
    def reason(self) -> str:
        return self.detail["reason"]


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
