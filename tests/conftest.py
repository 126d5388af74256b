"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

SAMSUNG_GALAXY_S6 = (
    "Mozilla/5.0 (Linux; Android 5.0.2; SAMSUNG SM-G925F Build/LRX22G) "
    "AppleWebKit/537.36 (KHTML, like Gecko) SamsungBrowser/3.0 "
    "Chrome/38.0.2125.102 Mobile Safari/537.36"
)

CHROME_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@pytest.fixture
def samsung_ua() -> str:
    """A Samsung Galaxy S6 user agent string."""
    return SAMSUNG_GALAXY_S6


@pytest.fixture
def chrome_ua() -> str:
    """A desktop Chrome on Windows 10 user agent string."""
    return CHROME_WINDOWS


@pytest.fixture
def rule_document():
    """A small rule table document covering every field spec kind."""
    return {
        "version": "test-1",
        "last_updated": "2026-01-01",
        "browser": [
            [[r"(testbrowser)\/([\w\.]+)"], ["name", "version"]],
            [[r"legacy\/(\d+)"], ["version", ["name", "Legacy"]]],
        ],
        "engine": [
            [[r"(testengine)\/([\w\.]+)"], [["name", "trim"], "version"]],
        ],
        "os": [
            [[r"testos ([\d_]+)"], [["version", "_", "."], ["name", "TestOS"]]],
            [[r"windows (nt [\d\.]+)"], [["version", "mapping", "windows"], ["name", "Windows"]]],
        ],
        "cpu": [
            [[r"(PowerPC)"], [["architecture", "ower", "", "lowerize"]]],
        ],
        "device": [
            [[r"(Phone)-(\w+)"], [["type", "lowerize"], "model", ["vendor", "Acme"]]],
        ],
    }


@pytest.fixture
def rule_file(tmp_path: Path, rule_document):
    """Write the sample rule table to a JSON file."""
    import json

    path = tmp_path / "rules.json"
    path.write_text(json.dumps(rule_document), encoding="utf-8")
    return path


@pytest.fixture
def reset_loggers():
    """Remove logging handlers installed during a test."""
    import logging

    from uaclassify.core.logging_config import ROOT_LOGGER_NAME, UAClassifyLogger

    yield
    for name in (ROOT_LOGGER_NAME, f"{ROOT_LOGGER_NAME}.results"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
    UAClassifyLogger().loggers.clear()
