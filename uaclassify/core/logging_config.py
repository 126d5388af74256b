"""Logging configuration for uaclassify.

This module sets up logging with file rotation and a separate log for
classification results.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

# Log format constants
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"
RESULTS_FORMAT = "%(asctime)s | %(levelname)-8s | RESULT | %(message)s"

# Results are recorded whatever the console verbosity
RESULTS_LOG_LEVEL = logging.INFO

# Default settings
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "uaclassify"


class UAClassifyLogger:
    """Centralized logger management for uaclassify.

    Manages two log files:
        - main.log: General application logging
        - results.log: One line per classified user agent
    """

    _instance: Optional["UAClassifyLogger"] = None
    _initialized: bool = False

    def __new__(cls) -> "UAClassifyLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return

        self.logs_dir: Path | None = None
        self.log_level: int = DEFAULT_LOG_LEVEL
        self.loggers: dict[str, logging.Logger] = {}
        self._initialized = True

    def setup(
        self,
        logs_dir: Path,
        log_level: int = DEFAULT_LOG_LEVEL,
        console_output: bool = True,
    ) -> None:
        """Initialize logging with specified configuration.

        Args:
            logs_dir: Directory for log files.
            log_level: Logging level (e.g., logging.INFO).
            console_output: Whether to also log to console.
        """
        self.logs_dir = logs_dir
        self.log_level = log_level

        logs_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(log_level)

        # Drop handlers from a previous setup() call
        self._close_handlers(root_logger)

        root_logger.addHandler(
            self._create_file_handler(logs_dir / "main.log", DETAILED_FORMAT)
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
            root_logger.addHandler(console_handler)

        self.loggers["main"] = root_logger

        self._setup_results_logger(logs_dir)

    def _close_handlers(self, logger: logging.Logger) -> None:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def _create_file_handler(
        self,
        log_path: Path,
        format_string: str,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
        level: Optional[int] = None,
    ) -> RotatingFileHandler:
        """Create a rotating file handler.

        Args:
            log_path: Path to the log file.
            format_string: Log format string.
            max_bytes: Maximum file size before rotation.
            backup_count: Number of backup files to keep.
            level: Handler level (default: the configured log level).

        Returns:
            Configured RotatingFileHandler.
        """
        handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setLevel(self.log_level if level is None else level)
        handler.setFormatter(logging.Formatter(format_string))
        return handler

    def _setup_results_logger(self, logs_dir: Path) -> None:
        """Setup the classification results logger."""
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.results")
        logger.setLevel(RESULTS_LOG_LEVEL)
        logger.propagate = False  # Don't also log to main

        self._close_handlers(logger)
        logger.addHandler(
            self._create_file_handler(
                logs_dir / "results.log", RESULTS_FORMAT, level=RESULTS_LOG_LEVEL
            )
        )
        self.loggers["results"] = logger

    def get_logger(self, name: str = "main") -> logging.Logger:
        """Get a logger by name.

        Args:
            name: Logger name ("main", "results").

        Returns:
            The requested logger, or a child of the main logger if not found.
        """
        if name in self.loggers:
            return self.loggers[name]

        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# Global logger instance
_logger_manager = UAClassifyLogger()


def setup_logging(
    logs_dir: Path,
    log_level: int = DEFAULT_LOG_LEVEL,
    console_output: bool = True,
) -> None:
    """Initialize the logging system.

    This should be called once at application startup.

    Args:
        logs_dir: Directory for log files.
        log_level: Logging level (default: INFO).
        console_output: Whether to also log to console (default: True).
    """
    _logger_manager.setup(logs_dir, log_level, console_output)


def get_logger(name: str = "main") -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name. Options:
            - "main": General application logging
            - "results": Classification results logging

    Returns:
        Logger instance.
    """
    return _logger_manager.get_logger(name)


def log_classification(
    user_agent: str,
    result: dict[str, Any],
    duration_ms: float,
) -> None:
    """Log one classified user agent.

    Args:
        user_agent: The classified string.
        result: Aggregate result as returned by UAParser.get_result().
        duration_ms: Time spent classifying in milliseconds.
    """
    logger = get_logger("results")
    browser = result.get("browser", {})
    os_record = result.get("os", {})
    device = result.get("device", {})
    logger.info(
        f"{browser.get('name') or '-'} {browser.get('version') or ''}".rstrip()
        + f" | {os_record.get('name') or '-'} {os_record.get('version') or ''}".rstrip()
        + f" | {device.get('type') or '-'}"
        + f" | {duration_ms:.2f}ms | {user_agent}"
    )
