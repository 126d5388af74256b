"""Configuration management for uaclassify.

This module handles loading, saving, and validating configuration
from JSON files and environment variables.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Default paths
DEFAULT_CONFIG_DIR = Path(os.environ.get("UACLASSIFY_HOME", "~/.uaclassify"))
DEFAULT_CONFIG_FILE = "config.json"
DEFAULT_RULES_DIR = "rules"
DEFAULT_LOGS_DIR = "logs"

# Environment variable holding the ambient client identification string
DEFAULT_USER_AGENT_ENV_VAR = "HTTP_USER_AGENT"

VALID_OUTPUT_FORMATS = ("text", "json")


@dataclass
class ParserConfig:
    """Configuration for rule loading and parsing behavior."""

    rules_file: str = ""  # Empty means the built-in rule table
    strict_transforms: bool = False  # Reject near-miss transform names
    verify_hash: bool = False
    expected_hash: str = ""
    user_agent_env_var: str = DEFAULT_USER_AGENT_ENV_VAR


@dataclass
class OutputConfig:
    """Configuration for command-line output."""

    format: str = "text"  # text, json
    color: bool = True
    show_empty: bool = False  # Print fields that hold no value


@dataclass
class Config:
    """Main configuration container for uaclassify.

    Attributes:
        config_dir: Base directory for all uaclassify data
        rules_dir: Directory for custom rule files
        logs_dir: Directory for log files
        parser: Rule loading and parsing configuration
        output: Command-line output configuration
    """

    config_dir: Path = field(default_factory=lambda: DEFAULT_CONFIG_DIR.expanduser())
    rules_dir: Path = field(default_factory=lambda: Path(DEFAULT_RULES_DIR))
    logs_dir: Path = field(default_factory=lambda: Path(DEFAULT_LOGS_DIR))

    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self) -> None:
        """Resolve relative paths to absolute paths."""
        if not self.rules_dir.is_absolute():
            self.rules_dir = self.config_dir / self.rules_dir
        if not self.logs_dir.is_absolute():
            self.logs_dir = self.config_dir / self.logs_dir
        if self.output.format not in VALID_OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{self.output.format}', "
                f"must be one of {VALID_OUTPUT_FORMATS}"
            )

    @property
    def rules_path(self) -> Path | None:
        """Resolved path of the custom rule file, if one is configured."""
        if not self.parser.rules_file:
            return None
        path = Path(self.parser.rules_file).expanduser()
        if not path.is_absolute():
            path = self.rules_dir / path
        return path

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        for directory in [self.config_dir, self.rules_dir, self.logs_dir]:
            directory.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for JSON serialization."""
        return {
            "config_dir": str(self.config_dir),
            "rules_dir": str(self.rules_dir),
            "logs_dir": str(self.logs_dir),
            "parser": {
                "rules_file": self.parser.rules_file,
                "strict_transforms": self.parser.strict_transforms,
                "verify_hash": self.parser.verify_hash,
                "expected_hash": self.parser.expected_hash,
                "user_agent_env_var": self.parser.user_agent_env_var,
            },
            "output": {
                "format": self.output.format,
                "color": self.output.color,
                "show_empty": self.output.show_empty,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        config_dir = Path(data["config_dir"]) if "config_dir" in data else None

        parser = ParserConfig()
        if "parser" in data:
            parser_data = data["parser"]
            parser = ParserConfig(
                rules_file=parser_data.get("rules_file", ""),
                strict_transforms=parser_data.get("strict_transforms", False),
                verify_hash=parser_data.get("verify_hash", False),
                expected_hash=parser_data.get("expected_hash", ""),
                user_agent_env_var=parser_data.get(
                    "user_agent_env_var", DEFAULT_USER_AGENT_ENV_VAR
                ),
            )

        output = OutputConfig()
        if "output" in data:
            output_data = data["output"]
            output = OutputConfig(
                format=output_data.get("format", "text"),
                color=output_data.get("color", True),
                show_empty=output_data.get("show_empty", False),
            )

        kwargs: dict[str, Any] = {"parser": parser, "output": output}
        if config_dir is not None:
            kwargs["config_dir"] = config_dir
        if "rules_dir" in data:
            kwargs["rules_dir"] = Path(data["rules_dir"])
        if "logs_dir" in data:
            kwargs["logs_dir"] = Path(data["logs_dir"])

        return cls(**kwargs)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with loaded settings.

    Raises:
        json.JSONDecodeError: If config file contains invalid JSON.
        ValueError: If config file contains invalid values.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_DIR.expanduser() / DEFAULT_CONFIG_FILE

    if not config_path.exists():
        # Return default config if no config file exists
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    return Config.from_dict(data)


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Config object to save.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path the configuration was written to.
    """
    if config_path is None:
        config_path = config.config_dir / DEFAULT_CONFIG_FILE

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)

    return config_path


def get_default_config() -> Config:
    """Get the default configuration.

    Returns:
        A new Config object with default settings.
    """
    return Config()
