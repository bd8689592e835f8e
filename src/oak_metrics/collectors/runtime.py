"""Collectors – interpreter and process statistics.

Produces a fixed set of gauges/counters describing the running Python
process.  Sources that the platform does not provide (``resource`` on
Windows, ``os.getloadavg`` where unsupported) are left out of the result.

CPU time is fractional, so it is published as the gauge
``process_cpu_seconds`` rather than a ``_total`` counter.
"""
from __future__ import annotations

import gc
import os
import platform
import sys
import threading
from typing import TYPE_CHECKING

from oak_metrics.metrics import Counter, Gauge, Metric
from oak_metrics.observability.logging import get_logger

if TYPE_CHECKING:
    from oak_metrics.registry import MetricsStore

try:
    import resource
except ImportError:  # not available on Windows
    resource = None  # type: ignore[assignment]

_log = get_logger(__name__)

_LOAD_PERIODS = ("1m", "5m", "15m")


class RuntimeCollector:
    """Snapshot interpreter/process statistics as metric values."""

    def collect(self) -> list[Metric]:
        """Return all available runtime metrics."""
        return [
            *self.collect_gc_metrics(),
            *self.collect_thread_metrics(),
            *self.collect_info_metrics(),
            *self.collect_process_metrics(),
            *self.collect_load_metrics(),
        ]

    def collect_gc_metrics(self) -> list[Metric]:
        metrics: list[Metric] = []
        for generation, stats in enumerate(gc.get_stats()):
            labels = {"generation": str(generation)}
            metrics.append(
                Counter(
                    "python_gc_collections_total",
                    "Number of times this generation was collected",
                    labels,
                    value=int(stats.get("collections", 0)),
                )
            )
            metrics.append(
                Counter(
                    "python_gc_objects_collected_total",
                    "Objects collected during gc",
                    labels,
                    value=int(stats.get("collected", 0)),
                )
            )
        return metrics

    def collect_thread_metrics(self) -> list[Metric]:
        return [Gauge("python_threads", "Number of alive threads", value=threading.active_count())]

    def collect_info_metrics(self) -> list[Metric]:
        return [
            Gauge(
                "python_info",
                "Python platform information",
                {
                    "implementation": platform.python_implementation(),
                    "version": platform.python_version(),
                },
                value=1,
            )
        ]

    def collect_process_metrics(self) -> list[Metric]:
        if resource is None:
            return []
        usage = resource.getrusage(resource.RUSAGE_SELF)
        # ru_maxrss is kilobytes on Linux, bytes on macOS
        max_rss = usage.ru_maxrss if sys.platform == "darwin" else usage.ru_maxrss * 1024
        return [
            Gauge(
                "process_max_resident_memory_bytes",
                "Peak resident memory size in bytes",
                value=max_rss,
            ),
            Gauge(
                "process_cpu_seconds",
                "Total user and system CPU time spent in seconds",
                value=usage.ru_utime + usage.ru_stime,
            ),
        ]

    def collect_load_metrics(self) -> list[Metric]:
        try:
            loads = os.getloadavg()
        except (AttributeError, OSError):
            _log.debug("runtime_collector.load_average_unavailable")
            return []
        return [
            Gauge("system_load_average", "System load average", {"period": period}, value=load)
            for period, load in zip(_LOAD_PERIODS, loads)
        ]


def collect_runtime_metrics(store: "MetricsStore", collector: RuntimeCollector | None = None) -> int:
    """Push a fresh runtime snapshot into *store*; returns the number pushed."""
    metrics = (collector or RuntimeCollector()).collect()
    store.push_many(metrics)
    return len(metrics)


__all__ = ["RuntimeCollector", "collect_runtime_metrics"]
