"""Metrics – immutable Counter, Gauge, Histogram and Summary values."""
from oak_metrics.metrics.base import MetricBase
from oak_metrics.metrics.counter import Counter
from oak_metrics.metrics.gauge import Gauge
from oak_metrics.metrics.histogram import DEFAULT_BUCKETS, INF, Histogram, normalize_buckets
from oak_metrics.metrics.identity import LabelSet, identity_parts, metric_id, normalize_labels
from oak_metrics.metrics.quantile import is_valid_quantile, quantile
from oak_metrics.metrics.summary import DEFAULT_QUANTILES, Summary

Metric = Counter | Gauge | Histogram | Summary
METRIC_TYPES: tuple[type[MetricBase], ...] = (Counter, Gauge, Histogram, Summary)

__all__ = [
    "DEFAULT_BUCKETS",
    "DEFAULT_QUANTILES",
    "INF",
    "METRIC_TYPES",
    "Counter",
    "Gauge",
    "Histogram",
    "LabelSet",
    "Metric",
    "MetricBase",
    "Summary",
    "is_valid_quantile",
    "identity_parts",
    "metric_id",
    "normalize_buckets",
    "normalize_labels",
    "quantile",
]
