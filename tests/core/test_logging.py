"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from tokendiff.config.models import LoggingConfig, LogOutputConfig
from tokendiff.core.logging import (
    clear_run_id,
    configure_logging,
    get_run_id,
    log_file_path,
    set_run_id,
)


def _reset_logging() -> None:
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def _json_file_config(path: Path, level: str = "INFO") -> LoggingConfig:
    return LoggingConfig(
        level=level,  # type: ignore[arg-type]
        outputs=[LogOutputConfig(format="json", destination=str(path))],
    )


class TestRunIdCorrelation:
    """Run ID context variable tests."""

    def setup_method(self) -> None:
        """Clear run ID before each test."""
        clear_run_id()

    def test_given_run_id_when_set_then_can_retrieve(self) -> None:
        """Run ID can be set and retrieved."""
        # Given
        run_id = "test-123"

        # When
        result = set_run_id(run_id)

        # Then
        assert result == run_id
        assert get_run_id() == run_id

    def test_given_no_id_when_set_then_generates_uuid(self) -> None:
        """Set generates UUID-based ID when none provided."""
        # When
        rid = set_run_id()

        # Then
        assert len(rid) == 12  # uuid4().hex[:12]

    def test_given_set_id_when_clear_then_removes_id(self) -> None:
        """Clear removes the current run ID."""
        # Given
        set_run_id("to-clear")

        # When
        clear_run_id()

        # Then
        assert get_run_id() is None


class TestLogFilePath:
    """Tests for log_file_path."""

    def test_console_only_has_no_file(self) -> None:
        assert log_file_path(LoggingConfig()) is None

    def test_first_file_output_wins(self, tmp_path: Path) -> None:
        first = tmp_path / "a.log"
        config = LoggingConfig(
            outputs=[
                LogOutputConfig(destination="stderr"),
                LogOutputConfig(destination=str(first)),
                LogOutputConfig(destination=str(tmp_path / "b.log")),
            ]
        )

        assert log_file_path(config) == first


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        _reset_logging()
        clear_run_id()

    def teardown_method(self) -> None:
        _reset_logging()
        clear_run_id()

    def test_given_json_stderr_output_when_log_then_valid_json(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        configure_logging(LoggingConfig(level="INFO", outputs=[LogOutputConfig(format="json")]))

        # When
        structlog.get_logger("test").info("test message", key="value")

        # Then
        lines = [line for line in capsys.readouterr().err.splitlines() if line]
        data = json.loads(lines[-1])
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert data["level"] == "info"
        assert "timestamp" in data

    def test_given_run_id_when_log_then_attached(self, tmp_path: Path) -> None:
        """Active run ID is added to every event."""
        # Given
        log_file = tmp_path / "run.log"
        configure_logging(_json_file_config(log_file))
        set_run_id("abc123def456")

        # When
        structlog.get_logger().info("comparison_complete", added=1)

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["run_id"] == "abc123def456"
        assert data["added"] == 1

    def test_given_level_override_when_configure_then_replaces_config_level(
        self, tmp_path: Path
    ) -> None:
        """The level keyword (used by --verbose) beats the configured level."""
        # Given
        log_file = tmp_path / "test.log"

        # When
        configure_logging(_json_file_config(log_file, level="ERROR"), level="DEBUG")
        structlog.get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()

    def test_given_multi_output_config_when_configure_then_logs_to_all(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config)
        logger = structlog.get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then - info_file should have INFO only
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content

        # Then - debug_file inherits DEBUG from the config level
        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_reconfigure_when_log_then_old_handlers_gone(self, tmp_path: Path) -> None:
        """A second configure call replaces the first one's outputs."""
        # Given
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        configure_logging(_json_file_config(first))

        # When
        configure_logging(_json_file_config(second))
        structlog.get_logger().info("after reconfigure")

        # Then
        assert "after reconfigure" not in first.read_text()
        assert "after reconfigure" in second.read_text()

    def test_given_default_config_when_info_logged_then_dropped(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """The default WARNING level keeps per-comparison INFO lines quiet."""
        # Given
        configure_logging()

        # When
        structlog.get_logger().info("comparison_complete")
        structlog.get_logger().warning("duplicate_token_key", key="A/a")

        # Then
        err = capsys.readouterr().err
        assert "comparison_complete" not in err
        assert "duplicate_token_key" in err
