"""Exposition – render metric values as Prometheus text format (0.0.4).

Every metric becomes one block::

    # HELP <name> <help>
    # TYPE <name> <counter|gauge|histogram|summary>
    <name>{<k1>="<v1>",...} <value>

Blocks are terminated by a newline and separated from each other by a blank
line.  Labels are always emitted sorted by name.
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Final

from oak_metrics.metrics import Counter, Gauge, Histogram, Summary

CONTENT_TYPE: Final = "text/plain; version=0.0.4; charset=utf-8"


def format_value(value: int | float) -> str:
    """Format a sample value or threshold.

    Integers keep their digits, floats use ``repr`` and infinities/NaN use the
    exposition spellings ``+Inf``, ``-Inf`` and ``NaN``.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        return repr(value)
    return str(value)


def escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def escape_help(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def format_labels(labels: Mapping[str, str], extra: tuple[str, str] | None = None) -> str:
    """Render ``{k="v",...}`` sorted by key; *extra* (``le``/``quantile``) goes last.

    Returns ``""`` when there is nothing to render.
    """
    pairs = [f'{key}="{escape_label_value(str(labels[key]))}"' for key in sorted(labels)]
    if extra is not None:
        pairs.append(f'{extra[0]}="{escape_label_value(extra[1])}"')
    if not pairs:
        return ""
    return "{" + ",".join(pairs) + "}"


def _header(name: str, help_text: str, type_name: str) -> list[str]:
    return [f"# HELP {name} {escape_help(help_text)}", f"# TYPE {name} {type_name}"]


def _render_histogram(histogram: Histogram) -> list[str]:
    name, labels = histogram.name, histogram.labels
    lines = [
        f"{name}_bucket{format_labels(labels, ('le', format_value(threshold)))} "
        f"{histogram.bucket_counts[threshold]}"
        for threshold in histogram.buckets
    ]
    lines.append(f"{name}_sum{format_labels(labels)} {format_value(histogram.sum)}")
    lines.append(f"{name}_count{format_labels(labels)} {histogram.count}")
    return lines


def _render_summary(summary: Summary) -> list[str]:
    name, labels = summary.name, summary.labels
    lines = [
        f"{name}{format_labels(labels, ('quantile', format_value(q)))} "
        f"{format_value(summary.quantile(q))}"
        for q in summary.quantiles
    ]
    lines.append(f"{name}_sum{format_labels(labels)} {format_value(summary.sum)}")
    lines.append(f"{name}_count{format_labels(labels)} {summary.count}")
    return lines


def render_metric(metric: object) -> str:
    """Render one metric block, or ``""`` for anything that is not a metric."""
    match metric:
        case Counter() | Gauge():
            samples = [f"{metric.name}{format_labels(metric.labels)} {format_value(metric.value)}"]
        case Histogram():
            samples = _render_histogram(metric)
        case Summary():
            samples = _render_summary(metric)
        case _:
            return ""
    lines = _header(metric.name, metric.help, metric.type_name) + samples
    return "\n".join(lines) + "\n"


def render(metrics: Iterable[object]) -> str:
    """Render *metrics* in iteration order; unknown values are skipped."""
    blocks = [block for block in map(render_metric, metrics) if block]
    return "\n".join(blocks)


__all__ = [
    "CONTENT_TYPE",
    "escape_help",
    "escape_label_value",
    "format_labels",
    "format_value",
    "render",
    "render_metric",
]
