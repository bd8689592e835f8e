"""Registry – the shared, lock-guarded metric store."""
from oak_metrics.registry.store import MetricsStore

__all__ = ["MetricsStore"]
