"""Metrics – Gauge."""
from __future__ import annotations

import dataclasses

from oak_metrics.kernel.errors import ConstructionError
from oak_metrics.metrics.base import MetricBase, is_real, require_real


@dataclasses.dataclass(frozen=True)
class Gauge(MetricBase):
    """Single numeric value that can go up and down.

    ``inc`` and ``dec`` accept negative amounts: ``inc(-2)`` is the same as
    ``dec(2)``.
    """

    type_name = "gauge"

    value: int | float = 0

    def _validate(self) -> None:
        if not is_real(self.value):
            raise ConstructionError(
                f"Gauge {self.name!r} value must be a real number, got {self.value!r}",
                metric_name=self.name,
            )

    def set(self, value: int | float) -> "Gauge":
        require_real(value, "gauge.set")
        return self._replace(value=value)

    def inc(self, amount: int | float = 1) -> "Gauge":
        require_real(amount, "gauge.inc")
        return self._replace(value=self.value + amount)

    def dec(self, amount: int | float = 1) -> "Gauge":
        require_real(amount, "gauge.dec")
        return self._replace(value=self.value - amount)


__all__ = ["Gauge"]
