"""Metrics – Summary computed from every raw observation."""
from __future__ import annotations

import dataclasses
import functools
import math
import operator
from collections.abc import Iterable
from typing import Final

from oak_metrics.kernel.errors import ConstructionError
from oak_metrics.metrics.base import MetricBase, is_real, require_real
from oak_metrics.metrics.identity import LabelSet
from oak_metrics.metrics.quantile import is_valid_quantile, quantile

DEFAULT_QUANTILES: Final[tuple[float, ...]] = (0.5, 0.9, 0.95, 0.99)


def _sum_matches(total: object, observations: tuple[int | float, ...]) -> bool:
    if not is_real(total):
        return False
    # observe() accumulates left to right from 0
    running = functools.reduce(operator.add, observations, 0)
    if running == total or (math.isnan(running) and math.isnan(total)):
        return True
    if not all(math.isfinite(v) for v in (total, *observations)):
        return False
    return math.isclose(total, math.fsum(observations), rel_tol=1e-9, abs_tol=1e-9)


@dataclasses.dataclass(frozen=True)
class Summary(MetricBase):
    """Tracks sum, count and on-demand quantiles over all observations.

    Observations are retained for the lifetime of the value; quantiles are
    never stored and are recomputed by :meth:`quantile` on every call.
    """

    type_name = "summary"

    quantiles: tuple[float, ...] = DEFAULT_QUANTILES
    sum: int | float = 0
    count: int = 0
    observations: tuple[int | float, ...] = ()

    @classmethod
    def of(
        cls,
        name: str,
        help: str,
        quantiles: Iterable[float] = DEFAULT_QUANTILES,
        labels: LabelSet | None = None,
    ) -> "Summary":
        return cls(name=name, help=help, labels=dict(labels or {}), quantiles=tuple(quantiles))

    def _validate(self) -> None:
        quantiles = tuple(self.quantiles)
        if not quantiles:
            raise ConstructionError(
                f"Summary {self.name!r} quantiles cannot be empty", metric_name=self.name
            )
        invalid = [q for q in quantiles if not is_valid_quantile(q)]
        if invalid:
            raise ConstructionError(
                f"Summary {self.name!r} quantiles must be numbers in [0, 1], got {invalid!r}",
                metric_name=self.name,
            )
        if len(set(quantiles)) != len(quantiles):
            raise ConstructionError(
                f"Summary {self.name!r} quantiles must be unique, got {list(quantiles)!r}",
                metric_name=self.name,
            )
        observations = tuple(self.observations)
        if self.count != len(observations):
            raise ConstructionError(
                f"Summary {self.name!r} count does not match its observations",
                metric_name=self.name,
            )
        if not all(is_real(v) for v in observations):
            raise ConstructionError(
                f"Summary {self.name!r} observations must be real numbers",
                metric_name=self.name,
            )
        if not _sum_matches(self.sum, observations):
            raise ConstructionError(
                f"Summary {self.name!r} sum {self.sum!r} does not match its observations",
                metric_name=self.name,
            )
        object.__setattr__(self, "quantiles", quantiles)
        object.__setattr__(self, "observations", observations)

    def observe(self, value: int | float) -> "Summary":
        require_real(value, "summary.observe")
        return self._replace(
            sum=self.sum + value,
            count=self.count + 1,
            observations=(*self.observations, value),
        )

    def quantile(self, q: float) -> int | float:
        """Estimate quantile *q* (``0 <= q <= 1``) from the observations."""
        return quantile(self.observations, q)


__all__ = ["DEFAULT_QUANTILES", "Summary"]
