"""Exposition – read sample lines back out of Prometheus text format."""
from __future__ import annotations

import dataclasses
import math
import re

from oak_metrics.kernel.errors import ExpositionParseError

_SAMPLE = re.compile(
    r"^(?P<name>[a-zA-Z_:][a-zA-Z0-9_:]*)"
    r"(?:\{(?P<labels>.*)\})?"
    r"\s+(?P<value>\S+)"
    r"(?:\s+(?P<timestamp>-?\d+))?\s*$"
)
_LABEL = re.compile(r'\s*(?P<key>[a-zA-Z_][a-zA-Z0-9_]*)="(?P<value>(?:[^"\\]|\\.)*)"\s*(?:,|$)')
_UNESCAPES = {"\\\\": "\\", '\\"': '"', "\\n": "\n"}


@dataclasses.dataclass(frozen=True)
class Sample:
    """One parsed sample line."""

    name: str
    labels: dict[str, str]
    value: float


def _unescape(raw: str) -> str:
    return re.sub(r"\\[\\\"n]", lambda m: _UNESCAPES[m.group(0)], raw)


def _parse_value(raw: str, line: str) -> float:
    special = {"+Inf": math.inf, "-Inf": -math.inf, "NaN": math.nan}
    if raw in special:
        return special[raw]
    try:
        return float(raw)
    except ValueError as exc:
        raise ExpositionParseError(f"Invalid sample value {raw!r}", line=line) from exc


def _parse_labels(raw: str, line: str) -> dict[str, str]:
    labels: dict[str, str] = {}
    pos = 0
    raw = raw.strip()
    while pos < len(raw):
        match = _LABEL.match(raw, pos)
        if match is None:
            raise ExpositionParseError(f"Malformed label set {{{raw}}}", line=line)
        labels[match.group("key")] = _unescape(match.group("value"))
        pos = match.end()
    return labels


def parse_sample_line(line: str) -> Sample:
    """Parse ``name{k="v",...} value [timestamp]``."""
    match = _SAMPLE.match(line.strip())
    if match is None:
        raise ExpositionParseError(f"Not a sample line: {line!r}", line=line)
    return Sample(
        name=match.group("name"),
        labels=_parse_labels(match.group("labels") or "", line),
        value=_parse_value(match.group("value"), line),
    )


def parse_text(text: str) -> list[Sample]:
    """Parse every sample of an exposition document, skipping comments and blanks."""
    return [
        parse_sample_line(line)
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]


__all__ = ["Sample", "parse_sample_line", "parse_text"]
