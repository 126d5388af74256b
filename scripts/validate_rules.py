#!/usr/bin/env python3
"""Validate user agent rule files.

Unlike loading a file with RuleSet.load_from_file(), which stops at the
first problem, this reports every problem it finds.

Usage:
    python scripts/validate_rules.py rules/custom.json
    python scripts/validate_rules.py path/to/a.json path/to/b.json
"""

import json
import sys
from pathlib import Path
from typing import Any

from uaclassify.classification.fields import compile_pattern, decode_field_spec
from uaclassify.classification.rules import METADATA_KEYS, split_rule_pairs
from uaclassify.core.models import Category, RuleSetError

VALID_CATEGORIES = {category.value for category in Category}


def validate_rule(category: str, index: int, patterns: Any, specs: Any) -> list[str]:
    """Validate a single rule. Returns list of errors."""
    errors = []
    prefix = f"{category}[{index}]"

    if isinstance(patterns, str):
        patterns = [patterns]
    if not isinstance(patterns, list) or not patterns:
        errors.append(f"{prefix}: patterns must be a non-empty list")
        patterns = []

    for pattern in patterns:
        try:
            compile_pattern(pattern)
        except RuleSetError as e:
            errors.append(f"{prefix}: {e}")

    if not isinstance(specs, list):
        errors.append(f"{prefix}: field specs must be a list")
        return errors

    seen_names: set[str] = set()
    for position, spec in enumerate(specs):
        try:
            field_spec = decode_field_spec(spec, strict_transforms=True)
        except RuleSetError as e:
            errors.append(f"{prefix} spec {position}: {e}")
            continue
        if field_spec.name in seen_names:
            errors.append(f"{prefix} spec {position}: duplicate field '{field_spec.name}'")
        seen_names.add(field_spec.name)

    return errors


def validate_file(path: Path) -> tuple[int, list[str]]:
    """Validate a rule file. Returns (rule_count, errors)."""
    errors = []

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return 0, [f"Invalid JSON: {e}"]

    if not isinstance(data, dict):
        return 0, ["File must contain a JSON object keyed by category"]

    if "version" not in data:
        errors.append("Missing 'version' field in file metadata")

    count = 0
    for key, entries in data.items():
        if key in METADATA_KEYS:
            continue
        if key not in VALID_CATEGORIES:
            errors.append(f"Unknown category '{key}', must be one of {sorted(VALID_CATEGORIES)}")
            continue
        if not isinstance(entries, list):
            errors.append(f"{key}: rules must be a list")
            continue

        try:
            pairs = split_rule_pairs(key, entries)
        except RuleSetError as e:
            errors.append(str(e))
            continue

        count += len(pairs)
        for index, (patterns, specs) in enumerate(pairs):
            errors.extend(validate_rule(key, index, patterns, specs))

    return count, errors


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(f"Usage: {sys.argv[0]} <rule_file.json> [...]")
        return 1

    total_errors = 0
    for filepath in args:
        path = Path(filepath)
        if not path.exists():
            print(f"ERROR: File not found: {path}")
            total_errors += 1
            continue

        count, errors = validate_file(path)

        if errors:
            print(f"\n{path}: {count} rules, {len(errors)} error(s)")
            for err in errors:
                print(f"  - {err}")
            total_errors += len(errors)
        else:
            print(f"{path}: {count} rules, all valid")

    if total_errors > 0:
        print(f"\nTotal errors: {total_errors}")
        return 1

    print("\nAll rule files valid.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
