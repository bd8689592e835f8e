"""FastAPI adapter – request metrics middleware."""
from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from oak_metrics.adapters.fastapi.routers import _require_fastapi

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

    from oak_metrics.registry import MetricsStore


class MetricsMiddleware:
    """Record per-route request counts and latency histograms into a store.

    Each HTTP request increments ``<prefix>_requests_total{method,path,status}``
    and observes ``<prefix>_request_duration_seconds{method,path}``.  Paths in
    *exclude_paths* (the scrape endpoint by default) are not recorded.
    """

    def __init__(
        self,
        app: "ASGIApp",
        store: "MetricsStore",
        prefix: str = "http",
        exclude_paths: tuple[str, ...] = ("/metrics",),
    ) -> None:
        _require_fastapi()
        self.app = app
        self._store = store
        self._requests = f"{prefix}_requests_total"
        self._latency = f"{prefix}_request_duration_seconds"
        self._exclude = frozenset(exclude_paths)

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http" or scope.get("path", "") in self._exclude:
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "GET")
        path = scope.get("path", "")
        labels: dict[str, str] = {"method": method, "path": path}
        start = time.perf_counter()
        status_code: list[int] = [500]

        async def send_capturing(message: Any) -> None:
            if message["type"] == "http.response.start":
                status_code[0] = message.get("status", 200)
            await send(message)

        try:
            await self.app(scope, receive, send_capturing)
        finally:
            elapsed = time.perf_counter() - start
            self._store.increment_counter(
                self._requests,
                {**labels, "status": str(status_code[0])},
                help="Total HTTP requests",
            )
            self._store.observe_histogram(
                self._latency,
                elapsed,
                labels,
                help="HTTP request latency in seconds",
            )


__all__ = ["MetricsMiddleware"]
