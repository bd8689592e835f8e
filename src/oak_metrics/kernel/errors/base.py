"""Root error class for the oak-metrics error hierarchy."""
from __future__ import annotations

from typing import Any, ClassVar


class OakMetricsError(Exception):
    """Root of every error raised by oak-metrics.

    Each subclass names a stable ``code`` and records the metric-side context
    of the failure (metric name, rejected operation, offending exposition
    line, ``OAK_*`` variable) in ``detail``.  ``None`` entries are dropped.

    :meth:`log_fields` flattens the error into keyword arguments for a
    structlog event::

        except ContractViolationError as exc:
            log.warning("metrics_store.rejected", **exc.log_fields())
    """

    code: ClassVar[str] = "oak_metrics_error"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = {k: v for k, v in detail.items() if v is not None}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def log_fields(self) -> dict[str, Any]:
        return {"error_code": self.code, "error": self.message, **self.detail}


__all__ = ["OakMetricsError"]
