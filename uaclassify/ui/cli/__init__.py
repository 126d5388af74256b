"""CLI module for uaclassify."""

from .formatters import (
    Colors,
    JsonFormatter,
    OutputFormatter,
    TableFormatter,
    TextFormatter,
    colorize,
    format_result,
    format_rule_info,
    get_formatter,
)

__all__ = [
    # Formatters
    "Colors",
    "colorize",
    "OutputFormatter",
    "TextFormatter",
    "JsonFormatter",
    "TableFormatter",
    "get_formatter",
    "format_result",
    "format_rule_info",
]
