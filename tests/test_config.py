"""Tests for configuration management."""

import json
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from uaclassify.core.config import (
    DEFAULT_USER_AGENT_ENV_VAR,
    Config,
    OutputConfig,
    ParserConfig,
    get_default_config,
    load_config,
    save_config,
)


class TestParserConfig:
    """Tests for ParserConfig."""

    def test_default_values(self):
        """Test default parser configuration values."""
        config = ParserConfig()

        assert config.rules_file == ""
        assert config.strict_transforms is False
        assert config.verify_hash is False
        assert config.expected_hash == ""
        assert config.user_agent_env_var == DEFAULT_USER_AGENT_ENV_VAR == "HTTP_USER_AGENT"


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self):
        """Test default output configuration values."""
        config = OutputConfig()

        assert config.format == "text"
        assert config.color is True
        assert config.show_empty is False


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Test default configuration creation."""
        config = Config()

        assert config.parser is not None
        assert config.output is not None
        assert config.rules_path is None

    def test_relative_dirs_resolved(self, tmp_path: Path) -> None:
        """Test relative directories are placed under config_dir."""
        config = Config(config_dir=tmp_path)

        assert config.rules_dir == tmp_path / "rules"
        assert config.logs_dir == tmp_path / "logs"

    def test_invalid_output_format(self):
        """Test an unknown output format is rejected."""
        with pytest.raises(ValueError, match="Invalid output format 'xml'"):
            Config(output=OutputConfig(format="xml"))

    def test_rules_path(self, tmp_path: Path) -> None:
        """Test resolving absolute and relative rule files."""
        relative = Config(config_dir=tmp_path, parser=ParserConfig(rules_file="custom.json"))
        absolute = Config(config_dir=tmp_path, parser=ParserConfig(rules_file="/etc/ua.json"))

        assert relative.rules_path == tmp_path / "rules" / "custom.json"
        assert absolute.rules_path == Path("/etc/ua.json")

    def test_ensure_directories(self):
        """Test directory creation."""
        with TemporaryDirectory() as tmpdir:
            config = Config(config_dir=Path(tmpdir) / "uaclassify")
            config.ensure_directories()

            assert config.config_dir.exists()
            assert config.rules_dir.exists()
            assert config.logs_dir.exists()

    def test_to_dict(self):
        """Test configuration serialization to dictionary."""
        data = Config().to_dict()

        assert "config_dir" in data
        assert "parser" in data
        assert "output" in data
        assert data["parser"]["strict_transforms"] is False
        assert data["output"]["format"] == "text"

    def test_from_dict(self):
        """Test configuration deserialization from dictionary."""
        data = {
            "parser": {
                "rules_file": "custom.json",
                "strict_transforms": True,
            },
            "output": {
                "format": "json",
            },
        }

        config = Config.from_dict(data)

        assert config.parser.rules_file == "custom.json"
        assert config.parser.strict_transforms is True
        assert config.parser.user_agent_env_var == "HTTP_USER_AGENT"
        assert config.output.format == "json"
        assert config.output.color is True

    def test_roundtrip(self, tmp_path: Path) -> None:
        """Test configuration roundtrip through dict."""
        original = Config(config_dir=tmp_path)
        original.parser.verify_hash = True
        original.parser.expected_hash = "ab" * 32
        original.output.show_empty = True

        restored = Config.from_dict(original.to_dict())

        assert restored.config_dir == original.config_dir
        assert restored.rules_dir == original.rules_dir
        assert restored.logs_dir == original.logs_dir
        assert restored.parser == original.parser
        assert restored.output == original.output


class TestConfigFileOperations:
    """Tests for config file save/load operations."""

    def test_save_and_load_config(self):
        """Test saving and loading configuration from file."""
        with TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"

            config = Config(config_dir=Path(tmpdir))
            config.parser.strict_transforms = True
            config.output.format = "json"
            assert save_config(config, config_path) == config_path

            assert config_path.exists()

            loaded = load_config(config_path)
            assert loaded.parser.strict_transforms is True
            assert loaded.output.format == "json"

    def test_save_default_location(self, tmp_path: Path) -> None:
        """Test saving without a path writes into config_dir."""
        config = Config(config_dir=tmp_path)

        path = save_config(config)

        assert path == tmp_path / "config.json"
        assert json.loads(path.read_text(encoding="utf-8"))["config_dir"] == str(tmp_path)

    def test_load_nonexistent_returns_default(self):
        """Test loading from nonexistent file returns default config."""
        with TemporaryDirectory() as tmpdir:
            config = load_config(Path(tmpdir) / "nonexistent.json")

            assert config.parser.rules_file == ""
            assert config.output.format == "text"

    def test_load_invalid_json(self, tmp_path: Path) -> None:
        """Test loading a corrupt file raises."""
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            load_config(path)

    def test_get_default_config(self):
        """Test get_default_config function."""
        config = get_default_config()

        assert isinstance(config, Config)
        assert config.output.format == "text"
