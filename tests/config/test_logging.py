"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from passmatch.config.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pm = logging.getLogger("passmatch")
    pm_level = pm.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pm.setLevel(pm_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("passmatch").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("passmatch").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("passmatch.test").warning("json test", answer=42)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "passmatch.test"
        assert "timestamp" in parsed

    def test_stdlib_records_get_structured_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("passmatch.infrastructure.enumerator").debug("Enumerated 3 sites")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "Enumerated 3 sites"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "passmatch.infrastructure.enumerator"

    def test_debug_hidden_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("passmatch.infrastructure.store").debug("noise")
        assert stream.getvalue() == ""

    def test_third_party_debug_is_suppressed(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("somelib").debug("library noise")
        assert stream.getvalue() == ""

    def test_console_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        structlog.get_logger("passmatch.test").warning("hello world", key="val")
        output = stream.getvalue()
        assert "hello world" in output
        assert "key" in output

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_namespaced(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        get_logger("telemetry").debug("span.complete")
        assert json.loads(stream.getvalue().strip())["logger"] == "passmatch.telemetry"

    def test_already_namespaced(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        get_logger("passmatch.cli").debug("x")
        assert json.loads(stream.getvalue().strip())["logger"] == "passmatch.cli"
