"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    OakMetricsError
    ├── MetricError              (metrics.py)
    │   ├── ConstructionError
    │   └── ContractViolationError
    └── ExpositionParseError     (metrics.py)

Configuration errors live in :mod:`oak_metrics.config.validation` and also
derive from :class:`OakMetricsError`.
"""

from oak_metrics.kernel.errors.base import OakMetricsError
from oak_metrics.kernel.errors.metrics import (
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
