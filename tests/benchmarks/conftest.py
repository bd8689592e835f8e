"""conftest.py for benchmarks.

Provides a store pre-populated with a realistic mix of metric families so
render and scrape benchmarks measure steady-state output size.
"""

from __future__ import annotations

import pytest

from oak_metrics.registry import MetricsStore


@pytest.fixture()
def populated_store():
    """Store holding 50 counters, 20 gauges, 10 histograms and 5 summaries."""
    store = MetricsStore()
    for i in range(50):
        store.increment_counter("requests_total", {"route": f"/r{i}"}, amount=i + 1)
    for i in range(20):
        store.set_gauge("queue_depth", float(i), {"queue": f"q{i}"})
    for i in range(10):
        for value in (0.003, 0.04, 0.2, 1.5, 12.0):
            store.observe_histogram("latency_seconds", value, {"route": f"/r{i}"})
    for i in range(5):
        for value in range(100):
            store.observe_summary("payload_bytes", value, {"route": f"/r{i}"})
    return store
