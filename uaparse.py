#!/usr/bin/env python3
"""uaparse - User agent string classifier.

Entry point for the command-line interface.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from uaclassify import __version__
from uaclassify.classification.engine import UAParser, create_default_parser
from uaclassify.classification.rules import RuleSet
from uaclassify.core.config import Config, load_config, save_config
from uaclassify.core.logging_config import get_logger, log_classification, setup_logging
from uaclassify.core.models import Category, ParseResult, RuleSetError
from uaclassify.ui.cli.formatters import get_formatter

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_RULES = 2


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="uaparse",
        description="Classify user agent strings into browser, engine, OS, CPU and device",
        epilog="For more information, see the documentation.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase verbosity (use -vv for debug)",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress console output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Classify user agent strings")
    parse_parser.add_argument(
        "user_agents",
        nargs="*",
        metavar="UA",
        help="Strings to classify (default: $HTTP_USER_AGENT)",
    )
    parse_parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read one string per line from standard input",
    )
    parse_parser.add_argument(
        "--category", "-c",
        choices=[category.value for category in Category],
        action="append",
        help="Only show specific categories (can be repeated)",
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    parse_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write results to file",
    )
    parse_parser.add_argument(
        "--rules",
        type=Path,
        help="Use a custom rule file instead of the configured one",
    )

    # Rules command
    rules_parser = subparsers.add_parser("rules", help="Show rule set information")
    rules_parser.add_argument(
        "--rules",
        type=Path,
        help="Rule file to inspect (default: configured or built-in rules)",
    )
    rules_parser.add_argument(
        "--export",
        type=Path,
        help="Export the rule set as JSON",
    )
    rules_parser.add_argument(
        "--json",
        action="store_true",
        help="Output information as JSON",
    )

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument(
        "--init",
        action="store_true",
        help="Create default configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )

    return parser


def get_log_level(verbose: int) -> int:
    """Get logging level from verbosity count."""
    if verbose >= 2:
        return logging.DEBUG
    elif verbose >= 1:
        return logging.INFO
    return logging.WARNING


def load_rule_set(rules_file: Path | None, config: Config) -> RuleSet:
    """Load the rule set selected by the command line or configuration."""
    if rules_file is not None:
        return RuleSet.load_from_file(
            rules_file.expanduser(),
            strict_transforms=config.parser.strict_transforms,
        )
    return create_default_parser("", config).rule_set


def collect_user_agents(args: argparse.Namespace) -> list[str | None]:
    """Gather the strings to classify; None stands for the ambient value."""
    user_agents: list[str | None] = list(args.user_agents)
    if args.stdin:
        user_agents.extend(line.rstrip("\r\n") for line in sys.stdin if line.strip())
    if not user_agents:
        user_agents.append(None)
    return user_agents


def run_parse(args: argparse.Namespace, config: Config) -> int:
    """Execute the parse command."""
    logger = get_logger("main")

    rule_set = load_rule_set(args.rules, config)
    categories = [Category.from_name(name) for name in args.category] if args.category else None

    results: list[ParseResult] = []
    for user_agent in collect_user_agents(args):
        parser = UAParser(user_agent, rule_set=rule_set, env_var=config.parser.user_agent_env_var)
        start = time.perf_counter()
        result = parser.parse()
        duration_ms = (time.perf_counter() - start) * 1000
        log_classification(result.input, result.to_dict(), duration_ms)
        results.append(result)

    logger.info(f"Classified {len(results)} user agent(s)")

    as_json = args.json or config.output.format == "json"
    formatter = get_formatter(
        as_json,
        use_colors=config.output.color and args.output is None,
        show_empty=config.output.show_empty,
    )
    if len(results) == 1:
        output = formatter.format_result(results[0], categories)
    else:
        output = formatter.format_result_list(results, categories)

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        print(f"Results written to {args.output}")
    else:
        print(output)

    return EXIT_OK


def run_rules(args: argparse.Namespace, config: Config) -> int:
    """Execute the rules command."""
    rule_set = load_rule_set(args.rules, config)

    if args.export:
        rule_set.export_to_file(args.export)
        print(f"Rules exported to {args.export}")

    formatter = get_formatter(args.json or config.output.format == "json", config.output.color)
    print(formatter.format_rule_info(rule_set.get_version_info()))
    return EXIT_OK


def run_config(args: argparse.Namespace, config: Config, config_path: Path | None) -> int:
    """Execute the config command."""
    if args.init:
        path = save_config(config, config_path)
        print(f"Configuration saved to {path}")
        return EXIT_OK

    if args.show:
        print(json.dumps(config.to_dict(), indent=2))
        return EXIT_OK

    print("Use --init to create config or --show to display current config")
    return EXIT_USAGE


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except (json.JSONDecodeError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    # Setup logging
    setup_logging(
        config.logs_dir,
        log_level=get_log_level(args.verbose),
        console_output=not args.quiet,
    )
    logger = get_logger("main")

    # Ensure directories exist
    config.ensure_directories()

    try:
        if args.command == "parse":
            return run_parse(args, config)
        elif args.command == "rules":
            return run_rules(args, config)
        elif args.command == "config":
            return run_config(args, config, args.config)
        elif args.command is None:
            parser.print_help()
            return EXIT_OK
    except RuleSetError as e:
        logger.error(f"Invalid rule set: {e}")
        return EXIT_RULES
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return EXIT_RULES

    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
