"""Observability – logging for the exporter itself."""

from oak_metrics.observability.logging import LoggingFactory, get_logger

__all__ = ["LoggingFactory", "get_logger"]
