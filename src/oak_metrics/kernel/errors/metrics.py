"""Metric errors – construction failures, mutation contract violations and parse errors."""
from __future__ import annotations

from typing import Any

from oak_metrics.kernel.errors.base import OakMetricsError


class MetricError(OakMetricsError):
    """Raised when a metric value is built or mutated incorrectly."""

    code = "metric_error"

    @property
    def metric_name(self) -> str | None:
        return self.detail.get("metric_name")


class ConstructionError(MetricError):
    """A metric could not be constructed from the supplied configuration.

    Covers empty name/help, duplicate histogram thresholds, inconsistent
    bucket counts and empty, duplicate or out-of-range summary quantiles.
    """

    code = "construction_error"

    def __init__(self, message: str, *, metric_name: str | None = None) -> None:
        super().__init__(message, metric_name=metric_name)


class ContractViolationError(MetricError):
    """A mutation was called with an argument it never accepts.

    These are programmer errors: the metric value the operation was called on
    is left unchanged.  ``detail["value"]`` holds the ``repr`` of the rejected
    argument; the argument itself is kept on :attr:`value`.
    """

    code = "contract_violation"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        value: Any = None,
        metric_name: str | None = None,
    ) -> None:
        super().__init__(
            message,
            operation=operation,
            value=None if value is None else repr(value),
            metric_name=metric_name,
        )
        self.value = value

    @property
    def operation(self) -> str | None:
        return self.detail.get("operation")


class ExpositionParseError(OakMetricsError):
    """A line of exposition text could not be parsed."""

    code = "exposition_parse_error"

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message, line=line)

    @property
    def line(self) -> str | None:
        return self.detail.get("line")


__all__ = [
    "ConstructionError",
    "ContractViolationError",
    "ExpositionParseError",
    "MetricError",
]
