"""Metrics – Counter."""
from __future__ import annotations

import dataclasses

from oak_metrics.kernel.errors import ConstructionError, ContractViolationError
from oak_metrics.metrics.base import MetricBase


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclasses.dataclass(frozen=True)
class Counter(MetricBase):
    """Cumulative metric whose value only grows or is reset to zero.

    Only non-negative integers are accepted; a negative amount is a contract
    violation and is never clamped::

        >>> Counter("jobs_total", "Jobs processed").inc().inc(4).value
        5
    """

    type_name = "counter"

    value: int = 0

    def _validate(self) -> None:
        if not _is_count(self.value):
            raise ConstructionError(
                f"Counter {self.name!r} value must be a non-negative integer, got {self.value!r}",
                metric_name=self.name,
            )

    def inc(self, amount: int = 1) -> "Counter":
        """Return a copy incremented by *amount*."""
        self._require_count(amount, "inc")
        return self._replace(value=self.value + amount)

    def set(self, value: int) -> "Counter":
        """Return a copy holding *value*."""
        self._require_count(value, "set")
        return self._replace(value=value)

    def reset(self) -> "Counter":
        return self._replace(value=0)

    def _require_count(self, amount: object, operation: str) -> None:
        if not _is_count(amount):
            raise ContractViolationError(
                f"Counter.{operation}() expects a non-negative integer, got {amount!r}",
                operation=f"counter.{operation}",
                value=amount,
            )


__all__ = ["Counter"]
