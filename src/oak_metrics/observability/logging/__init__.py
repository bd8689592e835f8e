"""Observability – structured logging helpers."""
from oak_metrics.observability.logging.factory import LoggingFactory
from oak_metrics.observability.logging.processors import get_logger

__all__ = ["LoggingFactory", "get_logger"]
