"""Metrics – MetricBase value object shared by all metric types."""
from __future__ import annotations

import dataclasses
import numbers
from typing import Any, ClassVar

from oak_metrics.kernel.errors import ConstructionError, ContractViolationError
from oak_metrics.metrics.identity import metric_id, normalize_labels


def is_real(value: object) -> bool:
    """``True`` for ints, floats and other real numbers, ``False`` for ``bool``."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def require_real(value: object, operation: str) -> None:
    if not is_real(value):
        raise ContractViolationError(
            f"{operation}() expects a real number, got {value!r}",
            operation=operation,
            value=value,
        )


@dataclasses.dataclass(frozen=True)
class MetricBase:
    """Immutable metric snapshot: name, help text and label set.

    Subclasses add their numeric state and return updated copies from every
    mutator; an instance is never modified after construction.
    """

    type_name: ClassVar[str] = "untyped"

    name: str
    help: str
    labels: dict[str, str] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConstructionError("Metric name cannot be empty", metric_name=self.name or None)
        if not isinstance(self.help, str) or not self.help.strip():
            raise ConstructionError(
                f"Help text for metric {self.name!r} cannot be empty",
                metric_name=self.name,
            )
        object.__setattr__(self, "labels", normalize_labels(self.labels))
        self._validate()

    def _validate(self) -> None:
        """Override to check type-specific state."""

    @property
    def id(self) -> str:
        """Registry identity derived from name and labels."""
        return metric_id(self.name, self.labels)

    def to_text(self) -> str:
        """Render this metric as an exposition block (HELP, TYPE and samples)."""
        from oak_metrics.exposition.renderer import render_metric

        return render_metric(self)

    def _replace(self, **changes: Any) -> Any:
        return dataclasses.replace(self, **changes)


__all__ = ["MetricBase", "is_real", "require_real"]
