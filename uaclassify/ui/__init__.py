"""User interface modules.

This package contains the user interface components:
- cli: Output formatters for the command-line interface
"""

from .cli import JsonFormatter, OutputFormatter, TextFormatter, format_result, format_rule_info

__all__ = [
    # CLI Formatters
    "OutputFormatter",
    "TextFormatter",
    "JsonFormatter",
    "format_result",
    "format_rule_info",
]
