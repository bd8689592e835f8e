"""Config settings – ExporterSettings."""
from __future__ import annotations

import dataclasses
import logging

from oak_metrics.config.settings.base import Settings
from oak_metrics.config.validation import InvalidSettingValueError
from oak_metrics.kernel.errors import ConstructionError
from oak_metrics.metrics import (
    DEFAULT_BUCKETS,
    DEFAULT_QUANTILES,
    is_valid_quantile,
    normalize_buckets,
)


@dataclasses.dataclass
class ExporterSettings(Settings):
    """Defaults for the metrics store and the scrape output.

    Read from ``OAK_*`` environment variables by the settings loaders, e.g.
    ``OAK_DEFAULT_BUCKETS=0.1,0.5,1`` or ``OAK_LOG_JSON=false``.
    """

    _prefix = "OAK"

    up_metric_name: str = "up"
    up_metric_help: str = "Exporter liveness status"
    default_buckets: list[float] = dataclasses.field(default_factory=lambda: list(DEFAULT_BUCKETS))
    default_quantiles: list[float] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_QUANTILES)
    )
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.up_metric_name.strip():
            self._reject("up_metric_name", "cannot be empty")
        if not self.up_metric_help.strip():
            self._reject("up_metric_help", "cannot be empty")
        try:
            normalize_buckets(self.up_metric_name, self.default_buckets)
        except ConstructionError as exc:
            raise InvalidSettingValueError(
                "default_buckets",
                self.default_buckets,
                exc.message,
                env_key=self.env_key("default_buckets"),
            ) from exc
        quantiles = list(self.default_quantiles)
        if not quantiles or not all(is_valid_quantile(q) for q in quantiles):
            self._reject("default_quantiles", "must be numbers in [0, 1]")
        if len(set(quantiles)) != len(quantiles):
            self._reject("default_quantiles", "must be unique")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            self._reject("log_level", "unknown log level")

    @property
    def level(self) -> int:
        """``log_level`` as a :mod:`logging` level number."""
        return logging.getLevelName(self.log_level.upper())


__all__ = ["ExporterSettings"]
