"""Collectors – producers that push process statistics into a store."""
from oak_metrics.collectors.runtime import RuntimeCollector, collect_runtime_metrics

__all__ = ["RuntimeCollector", "collect_runtime_metrics"]
