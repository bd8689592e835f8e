"""
oak_metrics – Prometheus metrics instrumentation and exposition.

Import path convention::

    from oak_metrics.metrics import Counter, Gauge, Histogram, Summary
    from oak_metrics.registry import MetricsStore
    from oak_metrics.exposition import render
    from oak_metrics.adapters.fastapi import MetricsRouter
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
