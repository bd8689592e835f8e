"""Exposition – Prometheus text format rendering and parsing."""
from oak_metrics.exposition.parser import Sample, parse_sample_line, parse_text
from oak_metrics.exposition.renderer import (
    CONTENT_TYPE,
    format_labels,
    format_value,
    render,
    render_metric,
)

__all__ = [
    "CONTENT_TYPE",
    "Sample",
    "format_labels",
    "format_value",
    "parse_sample_line",
    "parse_text",
    "render",
    "render_metric",
]
