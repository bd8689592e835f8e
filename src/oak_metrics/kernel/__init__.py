"""Kernel – shared building blocks with no dependency on the metric model."""

from oak_metrics.kernel.errors import (
    OakMetricsError,
    ConstructionError,
    ContractViolationError,
    ExpositionParseError,
    MetricError,
)

__all__ = [
    "OakMetricsError",
    "ConstructionError",
    "ContractViolationError",
    "ExpositionParseError",
    "MetricError",
]
