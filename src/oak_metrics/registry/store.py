"""Registry – MetricsStore, the single owner of live metric values.

All reads and writes go through one :class:`threading.Lock`.  The
create-if-absent-then-mutate helpers (:meth:`MetricsStore.increment_counter`
and friends) hold the lock for the whole lookup/mutate/store sequence, so
concurrent producers never lose an update or race to create the same series.

There is no process-wide instance: construct a store, hand it to producers and
to the scrape endpoint, and let the application own its lifetime::

    store = MetricsStore()
    store.increment_counter("jobs_total", {"queue": "default"})
    store.observe_histogram("job_seconds", 0.42)
    body = store.fetch_exposition_text()
"""
from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any, NoReturn, TypeVar

from oak_metrics.config.settings import ExporterSettings
from oak_metrics.exposition import render
from oak_metrics.kernel.errors import ContractViolationError
from oak_metrics.metrics import (
    METRIC_TYPES,
    Counter,
    Gauge,
    Histogram,
    LabelSet,
    Metric,
    Summary,
    identity_parts,
    metric_id,
)
from oak_metrics.observability.logging import get_logger

M = TypeVar("M", Counter, Gauge, Histogram, Summary)


class MetricsStore:
    """Thread-safe mapping of metric identity to the current metric value.

    Parameters
    ----------
    settings:
        Defaults for auto-created histograms/summaries and the liveness
        sample.  ``ExporterSettings()`` when omitted.
    """

    def __init__(self, settings: ExporterSettings | None = None) -> None:
        self._settings = settings or ExporterSettings()
        self._metrics: dict[str, Metric] = {}
        self._lock = threading.Lock()
        self._log = get_logger(__name__, component="metrics_store")
        self._log.info("metrics_store.started")

    @property
    def settings(self) -> ExporterSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def push(self, metric: Metric) -> None:
        """Store *metric* under its identity, replacing any previous value."""
        if not isinstance(metric, METRIC_TYPES):
            self._reject(
                ContractViolationError(
                    f"Only Counter, Gauge, Histogram and Summary can be stored, got {type(metric).__name__}",
                    operation="push",
                    value=metric,
                )
            )
        key = metric.id
        with self._lock:
            self._metrics[key] = metric
        self._log.debug("metrics_store.pushed", metric_id=key, metric_type=metric.type_name)

    def push_many(self, metrics: Iterable[Metric]) -> None:
        """Push every metric in *metrics*, in order."""
        for metric in metrics:
            self.push(metric)

    collect = push_many

    def get(self, identity: str) -> Metric | None:
        """Return the metric stored at *identity*, or ``None``."""
        with self._lock:
            return self._metrics.get(identity)

    def get_all(self) -> dict[str, Metric]:
        """Return a point-in-time copy of every stored metric."""
        with self._lock:
            return dict(self._metrics)

    def remove(self, identity: str) -> Metric | None:
        with self._lock:
            return self._metrics.pop(identity, None)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._metrics)
            self._metrics.clear()
        self._log.info("metrics_store.cleared", dropped=dropped)

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._metrics

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.get_all().values())

    # ------------------------------------------------------------------
    # Create-if-absent helpers
    # ------------------------------------------------------------------

    def _update(
        self,
        kind: type[M],
        name: str,
        labels: LabelSet | None,
        factory: Callable[[], M],
        mutate: Callable[[M], M],
    ) -> M:
        key = metric_id(name, labels)
        with self._lock:
            current = self._metrics.get(key)
            created = current is None
            if current is None:
                current = factory()
            elif not isinstance(current, kind):
                self._reject(
                    ContractViolationError(
                        f"Metric {key!r} is a {current.type_name}, not a {kind.type_name}",
                        operation=f"{kind.type_name}.update",
                        metric_name=name,
                    )
                )
            elif identity_parts(current.name, current.labels) != identity_parts(name, labels):
                self._reject(
                    ContractViolationError(
                        f"Labels {dict(labels or {})!r} collide with {current.labels!r} at {key!r}",
                        operation=f"{kind.type_name}.update",
                        value=dict(labels or {}),
                        metric_name=name,
                    )
                )
            updated = mutate(current)
            self._metrics[key] = updated
        if created:
            self._log.debug("metrics_store.created", metric_id=key, metric_type=kind.type_name)
        return updated

    def _reject(self, error: ContractViolationError) -> NoReturn:
        self._log.warning("metrics_store.rejected", **error.log_fields())
        raise error

    def increment_counter(
        self,
        name: str,
        labels: LabelSet | None = None,
        amount: int = 1,
        help: str | None = None,
    ) -> Counter:
        """Add *amount* to the counter ``name{labels}``, creating it at zero."""
        return self._update(
            Counter,
            name,
            labels,
            lambda: Counter(name, help or name, dict(labels or {})),
            lambda counter: counter.inc(amount),
        )

    def set_gauge(
        self,
        name: str,
        value: int | float,
        labels: LabelSet | None = None,
        help: str | None = None,
    ) -> Gauge:
        return self._update(
            Gauge, name, labels, self._gauge_factory(name, labels, help), lambda g: g.set(value)
        )

    def inc_gauge(
        self,
        name: str,
        amount: int | float = 1,
        labels: LabelSet | None = None,
        help: str | None = None,
    ) -> Gauge:
        return self._update(
            Gauge, name, labels, self._gauge_factory(name, labels, help), lambda g: g.inc(amount)
        )

    def dec_gauge(
        self,
        name: str,
        amount: int | float = 1,
        labels: LabelSet | None = None,
        help: str | None = None,
    ) -> Gauge:
        return self._update(
            Gauge, name, labels, self._gauge_factory(name, labels, help), lambda g: g.dec(amount)
        )

    def observe_histogram(
        self,
        name: str,
        value: int | float,
        labels: LabelSet | None = None,
        help: str | None = None,
        buckets: Iterable[int | float] | None = None,
    ) -> Histogram:
        """Record *value*; a new histogram uses *buckets* or the configured defaults.

        *buckets* only applies when the series does not exist yet.
        """
        thresholds = list(buckets) if buckets is not None else self._settings.default_buckets
        return self._update(
            Histogram,
            name,
            labels,
            lambda: Histogram.of(name, help or name, thresholds, labels),
            lambda histogram: histogram.observe(value),
        )

    def observe_summary(
        self,
        name: str,
        value: int | float,
        labels: LabelSet | None = None,
        help: str | None = None,
        quantiles: Iterable[float] | None = None,
    ) -> Summary:
        """Record *value*; a new summary uses *quantiles* or the configured defaults."""
        configured = list(quantiles) if quantiles is not None else self._settings.default_quantiles
        return self._update(
            Summary,
            name,
            labels,
            lambda: Summary.of(name, help or name, configured, labels),
            lambda summary: summary.observe(value),
        )

    @staticmethod
    def _gauge_factory(name: str, labels: LabelSet | None, help: str | None) -> Callable[[], Gauge]:
        return lambda: Gauge(name, help or name, dict(labels or {}))

    # ------------------------------------------------------------------
    # Exposition
    # ------------------------------------------------------------------

    def liveness_metric(self) -> Gauge:
        return Gauge(self._settings.up_metric_name, self._settings.up_metric_help, value=1)

    def fetch_exposition_text(self) -> str:
        """Render the liveness gauge followed by a snapshot ordered by identity."""
        snapshot = self.get_all()
        ordered: list[Any] = [snapshot[key] for key in sorted(snapshot)]
        return render([self.liveness_metric(), *ordered])


__all__ = ["MetricsStore"]
