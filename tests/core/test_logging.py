"""Tests for structured logging."""

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from routecov.config.models import LoggingConfig, LogOutputConfig
from routecov.core.logging import configure_logging, get_logger, start_run


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Reset logging state between tests."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    for handler in list(logging.getLogger().handlers):
        logging.getLogger().removeHandler(handler)
        handler.close()


def json_file_config(log_file: Path, level: str = "INFO") -> LoggingConfig:
    return LoggingConfig(
        level=level,  # type: ignore[arg-type]
        outputs=[LogOutputConfig(format="json", destination=str(log_file))],
    )


def read_events(log_file: Path) -> list[dict[str, object]]:
    for handler in logging.getLogger().handlers:
        handler.flush()
    return [json.loads(line) for line in log_file.read_text().splitlines() if line]


class TestStartRun:
    def test_given_run_id_when_started_then_returned(self) -> None:
        assert start_run("run-123") == "run-123"

    def test_given_no_id_when_started_then_generates_short_uuid(self) -> None:
        assert len(start_run()) == 12


class TestConfigureLogging:
    def test_given_json_file_output_when_log_then_writes_structured_event(
        self, tmp_path: Path
    ) -> None:
        # Given
        log_file = tmp_path / "routecov.log"
        configure_logging(json_file_config(log_file))
        logger = get_logger("routecov.coverage.ops")

        # When
        start_run("run-42")
        logger.info("route_coverage_summary", route_id="greetings", covered=2, total=3)

        # Then
        event = read_events(log_file)[-1]
        assert event["event"] == "route_coverage_summary"
        assert event["route_id"] == "greetings"
        assert event["run_id"] == "run-42"
        assert event["logger"] == "routecov.coverage.ops"
        assert event["level"] == "info"
        assert "_record" not in event

    def test_given_level_when_below_then_filtered(self, tmp_path: Path) -> None:
        log_file = tmp_path / "routecov.log"
        configure_logging(json_file_config(log_file, level="WARNING"))

        get_logger("routecov").info("hidden")
        get_logger("routecov").warning("shown")

        assert [e["event"] for e in read_events(log_file)] == ["shown"]

    def test_given_stdlib_record_when_logged_then_rendered_with_run_id(
        self, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "routecov.log"
        configure_logging(json_file_config(log_file))
        start_run("run-7")

        logging.getLogger("thirdparty").warning("plain message")

        event = read_events(log_file)[-1]
        assert event["event"] == "plain message"
        assert event["logger"] == "thirdparty"
        assert event["run_id"] == "run-7"

    def test_given_verbose_when_configured_then_debug_everywhere(self, tmp_path: Path) -> None:
        log_file = tmp_path / "routecov.log"
        config = LoggingConfig(
            level="ERROR",
            outputs=[
                LogOutputConfig(format="json", destination=str(log_file), level="ERROR")
            ],
        )
        configure_logging(config, verbose=True)

        get_logger("routecov").debug("details")

        assert logging.getLogger().level == logging.DEBUG
        assert [e["event"] for e in read_events(log_file)] == ["details"]

    def test_given_reconfigure_when_called_twice_then_single_handler(self) -> None:
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1
