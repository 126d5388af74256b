"""Tests for the uaparse command-line entry point."""

import io
import json
import logging
from pathlib import Path

import pytest

import uaparse
from uaclassify.classification.rules import get_default_rule_set
from uaclassify.core.config import Config, OutputConfig, ParserConfig, save_config

pytestmark = pytest.mark.usefixtures("reset_loggers")


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a configuration that keeps all files under tmp_path."""
    return save_config(Config(config_dir=tmp_path), tmp_path / "config.json")


def run(config_file: Path, *args: str) -> int:
    return uaparse.main(["--config", str(config_file), "-q", *args])


class TestArgumentParser:
    """Tests for argument parsing."""

    def test_version(self, capsys):
        """Test --version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            uaparse.main(["--version"])

        assert exc_info.value.code == 0
        assert "uaparse 0.1.0" in capsys.readouterr().out

    def test_log_levels(self):
        """Test verbosity maps to log levels."""
        assert uaparse.get_log_level(0) == logging.WARNING
        assert uaparse.get_log_level(1) == logging.INFO
        assert uaparse.get_log_level(2) == logging.DEBUG

    def test_unknown_category_rejected(self, config_file: Path) -> None:
        """Test an invalid --category is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            run(config_file, "parse", "--category", "gpu", "x")

        assert exc_info.value.code == 2


class TestParseCommand:
    """Tests for the parse command."""

    def test_parse_text(self, config_file: Path, samsung_ua: str, capsys) -> None:
        """Test text output for one string."""
        assert run(config_file, "parse", samsung_ua) == 0

        out = capsys.readouterr().out
        assert "name: Android" in out
        assert "vendor: Samsung" in out

    def test_parse_json(self, config_file: Path, samsung_ua: str, capsys) -> None:
        """Test JSON output for one string."""
        assert run(config_file, "parse", "--json", samsung_ua) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["input"] == samsung_ua
        assert data["os"] == {"name": "Android", "version": "5.0.2"}

    def test_parse_several(self, config_file: Path, samsung_ua: str, chrome_ua: str, capsys) -> None:
        """Test several strings produce a JSON array."""
        assert run(config_file, "parse", "--json", samsung_ua, chrome_ua) == 0

        data = json.loads(capsys.readouterr().out)
        assert [item["os"]["name"] for item in data] == ["Android", "Windows"]

    def test_parse_category_filter(self, config_file: Path, chrome_ua: str, capsys) -> None:
        """Test --category limits the output."""
        assert run(config_file, "parse", "--json", "-c", "cpu", chrome_ua) == 0

        data = json.loads(capsys.readouterr().out)
        assert data == {"input": chrome_ua, "cpu": {"architecture": "amd64"}}

    def test_parse_stdin(self, config_file: Path, samsung_ua: str, chrome_ua: str, monkeypatch, capsys) -> None:
        """Test reading strings from standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO(f"{samsung_ua}\n\n{chrome_ua}\n"))

        assert run(config_file, "parse", "--json", "--stdin") == 0

        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_parse_environment(self, config_file: Path, samsung_ua: str, monkeypatch, capsys) -> None:
        """Test the ambient HTTP_USER_AGENT is used without arguments."""
        monkeypatch.setenv("HTTP_USER_AGENT", samsung_ua)

        assert run(config_file, "parse", "--json") == 0

        assert json.loads(capsys.readouterr().out)["input"] == samsung_ua

    def test_parse_output_file(self, config_file: Path, tmp_path: Path, chrome_ua: str, capsys) -> None:
        """Test writing results to a file."""
        out = tmp_path / "result.json"

        assert run(config_file, "parse", "--json", "-o", str(out), chrome_ua) == 0

        assert json.loads(out.read_text(encoding="utf-8"))["browser"]["name"] == "Chrome"
        assert "Results written to" in capsys.readouterr().out

    def test_parse_custom_rules(self, config_file: Path, rule_file: Path, capsys) -> None:
        """Test --rules selects a custom rule file."""
        assert run(config_file, "parse", "--json", "--rules", str(rule_file), "TestBrowser/4.2") == 0

        assert json.loads(capsys.readouterr().out)["browser"]["major"] == "4"

    def test_parse_invalid_rules(self, config_file: Path, tmp_path: Path) -> None:
        """Test a malformed rule file exits with status 2."""
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"os": [[["(x"], ["name"]]]}), encoding="utf-8")

        assert run(config_file, "parse", "--rules", str(bad), "x") == 2

    def test_parse_missing_rules(self, config_file: Path, tmp_path: Path) -> None:
        """Test a missing rule file exits with status 2."""
        assert run(config_file, "parse", "--rules", str(tmp_path / "none.json"), "x") == 2

    def test_json_format_from_config(self, tmp_path: Path, chrome_ua: str, capsys) -> None:
        """Test output.format=json in the configuration."""
        config_file = save_config(
            Config(config_dir=tmp_path, output=OutputConfig(format="json")),
            tmp_path / "config.json",
        )

        assert run(config_file, "parse", chrome_ua) == 0

        assert json.loads(capsys.readouterr().out)["os"]["version"] == "10"

    def test_results_logged(self, config_file: Path, tmp_path: Path, chrome_ua: str) -> None:
        """Test classifications are written to results.log."""
        run(config_file, "parse", chrome_ua)

        assert chrome_ua in (tmp_path / "logs" / "results.log").read_text(encoding="utf-8")


class TestRulesCommand:
    """Tests for the rules command."""

    def test_builtin_info(self, config_file: Path, capsys) -> None:
        """Test showing built-in rule set information."""
        assert run(config_file, "rules", "--json") == 0

        info = json.loads(capsys.readouterr().out)
        assert info["source"] == "built-in"
        assert set(info["rules"]) == {"browser", "engine", "os", "cpu", "device"}

    def test_export(self, config_file: Path, tmp_path: Path, capsys) -> None:
        """Test exporting the rule set."""
        out = tmp_path / "export.json"

        assert run(config_file, "rules", "--export", str(out)) == 0

        data = json.loads(out.read_text(encoding="utf-8"))
        assert "browser" in data
        assert "Rules exported to" in capsys.readouterr().out

    def test_configured_rules_file(self, tmp_path: Path, rule_file: Path, capsys) -> None:
        """Test the rule file named in the configuration is used."""
        config_file = save_config(
            Config(config_dir=tmp_path, parser=ParserConfig(rules_file=str(rule_file))),
            tmp_path / "config.json",
        )

        assert run(config_file, "rules", "--json") == 0

        assert json.loads(capsys.readouterr().out)["version"] == "test-1"

    def test_builtin_rules_follow_strict_mode(self, tmp_path: Path) -> None:
        """Test strict mode builds its own built-in rule set, like the library does."""
        lenient = Config(config_dir=tmp_path)
        strict = Config(config_dir=tmp_path, parser=ParserConfig(strict_transforms=True))

        assert uaparse.load_rule_set(None, lenient) is get_default_rule_set()
        strict_rules = uaparse.load_rule_set(None, strict)
        assert strict_rules is not get_default_rule_set()
        assert strict_rules.count == get_default_rule_set().count


class TestConfigCommand:
    """Tests for the config command."""

    def test_show(self, config_file: Path, tmp_path: Path, capsys) -> None:
        """Test showing the configuration."""
        assert run(config_file, "config", "--show") == 0

        assert json.loads(capsys.readouterr().out)["config_dir"] == str(tmp_path)

    def test_init(self, tmp_path: Path, monkeypatch, capsys) -> None:
        """Test writing a configuration file."""
        monkeypatch.setattr("uaclassify.core.config.DEFAULT_CONFIG_DIR", tmp_path)
        config_file = tmp_path / "new" / "config.json"

        assert run(config_file, "config", "--init") == 0

        assert config_file.exists()
        assert "Configuration saved to" in capsys.readouterr().out

    def test_no_flags(self, config_file: Path, capsys) -> None:
        """Test config without flags is a usage error."""
        assert run(config_file, "config") == 1

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        """Test an unreadable configuration is a usage error."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{", encoding="utf-8")

        assert run(config_file, "config", "--show") == 1


class TestNoCommand:
    """Tests for running without a command."""

    def test_prints_help(self, config_file: Path, capsys) -> None:
        """Test help is printed."""
        assert run(config_file) == 0

        assert "usage: uaparse" in capsys.readouterr().out
