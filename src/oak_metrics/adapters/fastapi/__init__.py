"""FastAPI adapter – scrape router and request metrics middleware."""
from oak_metrics.adapters.fastapi.middleware import MetricsMiddleware
from oak_metrics.adapters.fastapi.routers import MetricsRouter

__all__ = ["MetricsMiddleware", "MetricsRouter"]
