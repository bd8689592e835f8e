"""Metrics – label sets and metric identity.

The identity of a metric is derived from its name and its label set only;
help text, type and numeric state never take part.  Two label sets holding the
same pairs always produce the same identity, whatever order the pairs were
supplied in::

    >>> metric_id("http_requests_total", {"status": "200", "method": "GET"})
    'http_requests_total|method_get,status_200'
    >>> metric_id("up", {})
    'up|'
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from oak_metrics.kernel.errors import ConstructionError

LabelSet = Mapping[str, Any]

_WHITESPACE = re.compile(r"\s+")


def normalize_labels(labels: LabelSet | None) -> dict[str, str]:
    """Return a new ``dict`` of ``str -> str`` ordered by label name.

    Raises :class:`ConstructionError` for empty or non-string label names.
    """
    if not labels:
        return {}
    normalized: dict[str, str] = {}
    for key in sorted(labels, key=str):
        if not isinstance(key, str) or not key:
            raise ConstructionError(f"Label names must be non-empty strings, got {key!r}")
        normalized[key] = str(labels[key])
    return normalized


def identity_parts(name: str, labels: LabelSet | None = None) -> tuple[str, tuple[tuple[str, str], ...]]:
    """Return the normalised ``(name, ((key, value), ...))`` behind :func:`metric_id`.

    Whitespace is removed and everything is lower-cased, pairs sorted by key.
    """
    pairs = tuple(
        (_squash(key), _squash(value)) for key, value in normalize_labels(labels).items()
    )
    return _squash(name), pairs


def metric_id(name: str, labels: LabelSet | None = None) -> str:
    """Derive the registry key for *name* + *labels*.

    Pairs are joined with ``_`` and ``,`` without escaping, so label sets
    that differ only in where an underscore falls share a key:
    ``{"a_b": "c"}`` and ``{"a": "b_c"}`` both give ``"c|a_b_c"`` for
    name ``c``.  :class:`~oak_metrics.registry.MetricsStore` compares
    :func:`identity_parts` to refuse updates across such a collision.
    """
    squashed_name, pairs = identity_parts(name, labels)
    return squashed_name + "|" + ",".join(f"{key}_{value}" for key, value in pairs)


def _squash(text: str) -> str:
    return _WHITESPACE.sub("", text).lower()


__all__ = ["LabelSet", "identity_parts", "metric_id", "normalize_labels"]
