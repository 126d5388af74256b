"""Output formatters for CLI output.

This module provides formatters for displaying classification results and
rule set information as text, JSON or tables.
"""

import json
import sys
from abc import ABC, abstractmethod
from typing import Any

from uaclassify.core.models import Category, ParseResult


# ANSI color codes for terminal output
class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    # Category colors
    BROWSER = "\033[94m"  # Blue
    ENGINE = "\033[96m"  # Cyan
    OS = "\033[92m"  # Green
    CPU = "\033[95m"  # Magenta
    DEVICE = "\033[93m"  # Yellow

    @classmethod
    def is_supported(cls) -> bool:
        """Check if terminal supports colors."""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def colorize(text: str, color: str, force: bool = False) -> str:
    """Apply color to text if supported.

    Args:
        text: Text to colorize
        color: ANSI color code
        force: Force color even if not supported

    Returns:
        Colored text or plain text
    """
    if force or Colors.is_supported():
        return f"{color}{text}{Colors.RESET}"
    return text


def get_category_color(category: Category) -> str:
    """Get color for a category heading."""
    color_map = {
        Category.BROWSER: Colors.BROWSER,
        Category.ENGINE: Colors.ENGINE,
        Category.OS: Colors.OS,
        Category.CPU: Colors.CPU,
        Category.DEVICE: Colors.DEVICE,
    }
    return color_map.get(category, Colors.RESET)


def _select(categories: list[Category] | None) -> list[Category]:
    return list(categories) if categories else list(Category)


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format_result(
        self, result: ParseResult, categories: list[Category] | None = None
    ) -> str:
        """Format the classification of one string."""
        pass

    @abstractmethod
    def format_result_list(
        self, results: list[ParseResult], categories: list[Category] | None = None
    ) -> str:
        """Format the classifications of several strings."""
        pass

    @abstractmethod
    def format_rule_info(self, info: dict[str, Any]) -> str:
        """Format rule set version information."""
        pass


class TextFormatter(OutputFormatter):
    """Plain text formatter with optional colors."""

    def __init__(self, use_colors: bool = True, show_empty: bool = False):
        """Initialize the text formatter.

        Args:
            use_colors: Whether to use ANSI colors
            show_empty: Whether to print fields that hold no value
        """
        self.use_colors = use_colors and Colors.is_supported()
        self.show_empty = show_empty

    def _colorize(self, text: str, color: str) -> str:
        """Apply color if enabled."""
        if self.use_colors:
            return colorize(text, color, force=True)
        return text

    def format_result(
        self, result: ParseResult, categories: list[Category] | None = None
    ) -> str:
        """Format one result, one block per category."""
        lines = [self._colorize(result.input or "(empty)", Colors.BOLD)]

        for category in _select(categories):
            record = result.get(category)
            heading = self._colorize(category.value.capitalize(), get_category_color(category))
            fields = [
                (name, value) for name, value in record.items() if value or self.show_empty
            ]
            if not fields:
                lines.append(f"  {heading}: {self._colorize('unknown', Colors.DIM)}")
                continue

            lines.append(f"  {heading}:")
            for name, value in fields:
                lines.append(f"    {name}: {value or '-'}")

        return "\n".join(lines)

    def format_result_list(
        self, results: list[ParseResult], categories: list[Category] | None = None
    ) -> str:
        """Format several results separated by blank lines."""
        if not results:
            return "No user agents to classify."

        return "\n\n".join(self.format_result(result, categories) for result in results)

    def format_rule_info(self, info: dict[str, Any]) -> str:
        """Format rule set version information with per-category counts."""
        lines = [
            self._colorize("Rule Set", Colors.BOLD),
            f"  Version: {info.get('version', 'unknown')}",
            f"  Last updated: {info.get('last_updated', 'unknown')}",
            f"  Source: {info.get('source', 'built-in')}",
        ]
        if info.get("hash"):
            lines.append(f"  SHA256: {info['hash']}")

        rows = [[name, str(count)] for name, count in info.get("rules", {}).items()]
        if rows:
            lines.append("")
            lines.append(TableFormatter().format_table(["Category", "Rules"], rows))
        lines.append(f"Total: {info.get('total_rules', 0)} rules")

        return "\n".join(lines)


class JsonFormatter(OutputFormatter):
    """JSON output formatter."""

    def __init__(self, indent: int = 2, compact: bool = False):
        """Initialize the JSON formatter.

        Args:
            indent: Indentation level
            compact: Whether to use compact output
        """
        self.indent = None if compact else indent

    def _result_data(
        self, result: ParseResult, categories: list[Category] | None
    ) -> dict[str, Any]:
        data = result.to_dict()
        if categories:
            selected = {category.value for category in categories}
            data = {key: value for key, value in data.items() if key == "input" or key in selected}
        return data

    def format_result(
        self, result: ParseResult, categories: list[Category] | None = None
    ) -> str:
        """Format one result as JSON."""
        return json.dumps(self._result_data(result, categories), indent=self.indent)

    def format_result_list(
        self, results: list[ParseResult], categories: list[Category] | None = None
    ) -> str:
        """Format several results as a JSON array."""
        data = [self._result_data(result, categories) for result in results]
        return json.dumps(data, indent=self.indent)

    def format_rule_info(self, info: dict[str, Any]) -> str:
        """Format rule set version information as JSON."""
        return json.dumps(info, indent=self.indent, default=str)


class TableFormatter:
    """Table-based output formatter."""

    def format_table(self, headers: list[str], rows: list[list[str]]) -> str:
        """Format data as a table.

        Columns are as wide as their widest cell.

        Args:
            headers: Column headers
            rows: Table rows

        Returns:
            Formatted table string
        """
        if not headers or not rows:
            return ""

        column_widths = [
            max([len(header)] + [len(str(row[i])) for row in rows if i < len(row)])
            for i, header in enumerate(headers)
        ]

        lines = [" | ".join(header.ljust(w) for header, w in zip(headers, column_widths))]
        lines.append("-+-".join("-" * w for w in column_widths))
        for row in rows:
            lines.append(" | ".join(str(cell).ljust(w) for cell, w in zip(row, column_widths)))

        return "\n".join(lines)


def get_formatter(
    as_json: bool = False, use_colors: bool = True, show_empty: bool = False
) -> OutputFormatter:
    """Get the formatter for an output mode."""
    if as_json:
        return JsonFormatter()
    return TextFormatter(use_colors=use_colors, show_empty=show_empty)


def format_result(
    result: ParseResult,
    categories: list[Category] | None = None,
    as_json: bool = False,
) -> str:
    """Format one classification result.

    Args:
        result: Result to format
        categories: Categories to include (all if None)
        as_json: Whether to output JSON

    Returns:
        Formatted string
    """
    return get_formatter(as_json, use_colors=False).format_result(result, categories)


def format_rule_info(info: dict[str, Any], as_json: bool = False) -> str:
    """Format rule set version information.

    Args:
        info: Output of RuleSet.get_version_info()
        as_json: Whether to output JSON

    Returns:
        Formatted string
    """
    return get_formatter(as_json, use_colors=False).format_rule_info(info)
