"""FastAPI adapter – Prometheus scrape router."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from oak_metrics.exposition import CONTENT_TYPE

if TYPE_CHECKING:
    from oak_metrics.registry import MetricsStore


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'oak-metrics[fastapi]' to use the FastAPI adapter"
        ) from exc


def MetricsRouter(
    store: "MetricsStore",
    path: str = "/metrics",
    tags: list[str] | None = None,
) -> Any:
    """Return a router serving ``store.fetch_exposition_text()`` at *path*."""
    _require_fastapi()
    from fastapi import APIRouter
    from fastapi.responses import Response

    router = APIRouter(tags=tags or ["ops"])

    @router.get(path, response_class=Response)
    async def metrics():  # noqa: ANN202
        return Response(content=store.fetch_exposition_text(), media_type=CONTENT_TYPE)

    return router


__all__ = ["MetricsRouter"]
