"""Metrics – order-statistic quantile estimator for summaries."""
from __future__ import annotations

import math
import numbers
from collections.abc import Sequence

from oak_metrics.kernel.errors import ContractViolationError

Number = int | float


def is_valid_quantile(q: object) -> bool:
    """``True`` when *q* is a real number in ``[0, 1]``."""
    if isinstance(q, bool) or not isinstance(q, numbers.Real):
        return False
    return 0 <= q <= 1


def quantile(observations: Sequence[Number], q: float) -> Number:
    """Estimate quantile *q* of *observations* by linear interpolation.

    The observations are sorted into a copy (the input is never reordered).
    The position ``q * (n - 1)`` is bracketed by its floor and ceiling indices
    and the two neighbouring values are interpolated using the fractional
    part as weight.  ``q=0`` yields the minimum, ``q=1`` the maximum, a single
    observation is returned as is and no observations yield ``0``.
    """
    if not is_valid_quantile(q):
        raise ContractViolationError(
            f"Quantile must be a number in [0, 1], got {q!r}",
            operation="quantile",
            value=q,
        )
    if not observations:
        return 0
    ordered = sorted(observations)
    if len(ordered) == 1:
        return ordered[0]

    position = q * (len(ordered) - 1)
    lower = math.floor(position)
    upper = math.ceil(position)
    if lower == upper:
        return ordered[lower]
    weight = position - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * weight


__all__ = ["is_valid_quantile", "quantile"]
