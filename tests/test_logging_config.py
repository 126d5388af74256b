"""Tests for logging configuration."""

import logging
from pathlib import Path

import pytest

from uaclassify.core.logging_config import (
    ROOT_LOGGER_NAME,
    UAClassifyLogger,
    get_logger,
    log_classification,
    setup_logging,
)

pytestmark = pytest.mark.usefixtures("reset_loggers")


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_singleton(self):
        """Test the manager is a singleton."""
        assert UAClassifyLogger() is UAClassifyLogger()

    def test_creates_log_files(self, tmp_path: Path) -> None:
        """Test log files are created in the logs directory."""
        logs_dir = tmp_path / "logs"

        setup_logging(logs_dir, console_output=False)
        get_logger("main").warning("hello")

        assert (logs_dir / "main.log").exists()
        assert (logs_dir / "results.log").exists()
        assert "hello" in (logs_dir / "main.log").read_text(encoding="utf-8")

    def test_console_handler(self, tmp_path: Path) -> None:
        """Test a console handler is installed only when requested."""
        setup_logging(tmp_path, console_output=True)
        with_console = len(logging.getLogger(ROOT_LOGGER_NAME).handlers)

        setup_logging(tmp_path, console_output=False)
        without_console = len(logging.getLogger(ROOT_LOGGER_NAME).handlers)

        assert with_console == 2
        assert without_console == 1

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path: Path) -> None:
        """Test calling setup twice replaces the previous handlers."""
        setup_logging(tmp_path, console_output=False)
        setup_logging(tmp_path, console_output=False)

        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1
        assert len(logging.getLogger(f"{ROOT_LOGGER_NAME}.results").handlers) == 1

    def test_log_level(self, tmp_path: Path) -> None:
        """Test the configured level is applied."""
        setup_logging(tmp_path, log_level=logging.DEBUG, console_output=False)

        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG

    def test_module_loggers_reach_main_log(self, tmp_path: Path) -> None:
        """Test module loggers propagate into main.log."""
        setup_logging(tmp_path, console_output=False)

        logging.getLogger("uaclassify.classification.rules").warning("from module")

        assert "from module" in (tmp_path / "main.log").read_text(encoding="utf-8")

class TestGetLogger:
    """Tests for get_logger()."""

    def test_unknown_name_is_child_logger(self):
        """Test unknown names map to children of the root logger."""
        assert get_logger("cli").name == "uaclassify.cli"

    def test_results_logger_does_not_propagate(self, tmp_path: Path) -> None:
        """Test results stay out of main.log."""
        setup_logging(tmp_path, console_output=False)

        results = get_logger("results")
        results.info("result line")

        assert results.propagate is False
        assert "result line" not in (tmp_path / "main.log").read_text(encoding="utf-8")

class TestLogClassification:
    """Tests for log_classification()."""

    def test_writes_result_line(self, tmp_path: Path) -> None:
        """Test one line is written per classification."""
        setup_logging(tmp_path, console_output=False)
        result = {
            "input": "UA",
            "browser": {"name": "Chrome", "version": "91.0", "major": "91"},
            "os": {"name": "Windows", "version": "10"},
            "device": {"vendor": "", "model": "", "type": ""},
        }

        log_classification("UA", result, 1.5)

        content = (tmp_path / "results.log").read_text(encoding="utf-8")
        assert "RESULT" in content
        assert "Chrome 91.0 | Windows 10 | - | 1.50ms | UA" in content

    def test_missing_records(self, tmp_path: Path) -> None:
        """Test empty records are written as dashes."""
        setup_logging(tmp_path, console_output=False)

        log_classification("", {}, 0.1)

        assert "- | - | - | 0.10ms" in (tmp_path / "results.log").read_text(encoding="utf-8")

    def test_written_at_warning_level(self, tmp_path: Path) -> None:
        """Test results are recorded when the main log level is WARNING."""
        setup_logging(tmp_path, log_level=logging.WARNING, console_output=False)

        log_classification("quiet UA", {}, 0.2)

        assert "quiet UA" in (tmp_path / "results.log").read_text(encoding="utf-8")
        assert get_logger("main").level == logging.WARNING
