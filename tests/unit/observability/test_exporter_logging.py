"""Unit tests for structlog setup and logger helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from oak_metrics.config import ExporterSettings
from oak_metrics.observability.logging import LoggingFactory, get_logger
from oak_metrics.registry import MetricsStore


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("oak.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("oak.test", component="unit").info("hello", extra_key=1)
        assert logs == [{"component": "unit", "extra_key": 1, "event": "hello", "log_level": "info"}]


class TestLoggingFactory:
    def test_configure_installs_single_root_handler(self) -> None:
        LoggingFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        LoggingFactory.configure(level=logging.INFO, json=True)
        get_logger("oak.json").warning("scrape.slow", duration_ms=12)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "scrape.slow"
        assert payload["duration_ms"] == 12
        assert payload["level"] == "warning"
        assert "timestamp" in payload

    def test_from_settings(self) -> None:
        LoggingFactory.from_settings(ExporterSettings(log_level="ERROR", log_json=False))
        assert logging.getLogger().level == logging.ERROR


class TestStoreLogging:
    def test_store_logs_lifecycle(self) -> None:
        with structlog.testing.capture_logs() as logs:
            store = MetricsStore()
            store.increment_counter("c")
            store.clear()
        events = [entry["event"] for entry in logs]
        assert events == [
            "metrics_store.started",
            "metrics_store.created",
            "metrics_store.cleared",
        ]
        assert all(entry["component"] == "metrics_store" for entry in logs)
