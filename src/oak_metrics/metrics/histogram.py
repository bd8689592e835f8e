"""Metrics – Histogram with cumulative buckets."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Mapping
from typing import Final

from oak_metrics.kernel.errors import ConstructionError
from oak_metrics.metrics.base import MetricBase, is_real, require_real
from oak_metrics.metrics.identity import LabelSet

INF: Final = math.inf

DEFAULT_BUCKETS: Final[tuple[float, ...]] = (
    0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0,
)


def normalize_buckets(name: str, buckets: Iterable[int | float]) -> tuple[int | float, ...]:
    """Sort *buckets* and append ``INF``; reject non-finite or duplicate thresholds."""
    thresholds = list(buckets)
    for threshold in thresholds:
        if not is_real(threshold) or math.isnan(threshold) or math.isinf(threshold):
            raise ConstructionError(
                f"Histogram {name!r} bucket thresholds must be finite numbers, got {threshold!r}",
                metric_name=name,
            )
    if len(set(thresholds)) != len(thresholds):
        raise ConstructionError(
            f"Histogram {name!r} bucket thresholds must be unique, got {thresholds!r}",
            metric_name=name,
        )
    return (*sorted(thresholds), INF)


@dataclasses.dataclass(frozen=True)
class Histogram(MetricBase):
    """Counts observations into cumulative ``le`` buckets.

    An observation ``v`` increments every bucket whose threshold is ``>= v``
    (the upper bound is inclusive), so ``bucket_counts[INF]`` always equals
    ``count``.  Build instances with :meth:`of`::

        >>> h = Histogram.of("latency", "Latency", [1, 5, 10]).observe(3.0).observe(7.0)
        >>> h.bucket_counts
        {1: 0, 5: 1, 10: 2, inf: 2}
    """

    type_name = "histogram"

    buckets: tuple[int | float, ...] = (INF,)
    sum: int | float = 0
    count: int = 0
    bucket_counts: Mapping[int | float, int] = dataclasses.field(
        default_factory=lambda: {INF: 0}, hash=False
    )

    @classmethod
    def of(
        cls,
        name: str,
        help: str,
        buckets: Iterable[int | float] = DEFAULT_BUCKETS,
        labels: LabelSet | None = None,
    ) -> "Histogram":
        """Create an empty histogram; ``+Inf`` is appended to *buckets*."""
        thresholds = normalize_buckets(name, buckets)
        return cls(
            name=name,
            help=help,
            labels=dict(labels or {}),
            buckets=thresholds,
            bucket_counts={threshold: 0 for threshold in thresholds},
        )

    def _validate(self) -> None:
        buckets = tuple(self.buckets)
        if not buckets or buckets[-1] != INF:
            raise ConstructionError(
                f"Histogram {self.name!r} buckets must end with +Inf; use Histogram.of()",
                metric_name=self.name,
            )
        finite = buckets[:-1]
        if list(finite) != sorted(set(finite)) or any(math.isinf(b) for b in finite):
            raise ConstructionError(
                f"Histogram {self.name!r} buckets must be sorted, unique and finite",
                metric_name=self.name,
            )
        if set(self.bucket_counts) != set(buckets):
            raise ConstructionError(
                f"Histogram {self.name!r} bucket counts do not match its buckets",
                metric_name=self.name,
            )
        counts = [self.bucket_counts[b] for b in buckets]
        if not all(isinstance(c, int) and not isinstance(c, bool) and c >= 0 for c in counts):
            raise ConstructionError(
                f"Histogram {self.name!r} bucket counts must be non-negative integers",
                metric_name=self.name,
            )
        if any(lower > upper for lower, upper in zip(counts, counts[1:])):
            raise ConstructionError(
                f"Histogram {self.name!r} bucket counts must be cumulative, got {counts!r}",
                metric_name=self.name,
            )
        if counts[-1] != self.count:
            raise ConstructionError(
                f"Histogram {self.name!r} +Inf bucket holds {counts[-1]} but count is {self.count}",
                metric_name=self.name,
            )
        object.__setattr__(self, "buckets", buckets)
        object.__setattr__(self, "bucket_counts", dict(zip(buckets, counts)))

    def observe(self, value: int | float) -> "Histogram":
        """Return a copy with *value* recorded."""
        require_real(value, "histogram.observe")
        counts = {
            threshold: count + 1 if value <= threshold else count
            for threshold, count in self.bucket_counts.items()
        }
        # NaN compares false against every threshold but still lands in +Inf
        counts[INF] = self.bucket_counts[INF] + 1
        return self._replace(sum=self.sum + value, count=self.count + 1, bucket_counts=counts)


__all__ = ["DEFAULT_BUCKETS", "INF", "Histogram", "normalize_buckets"]
