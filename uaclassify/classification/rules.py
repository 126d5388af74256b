"""Rule Set - the compiled, immutable rule table for all categories.

This module handles loading, validating and compiling rule tables. A rule
table document maps each category name to an ordered list of
``[patterns, field_specs]`` pairs. Everything is validated and compiled
when the RuleSet is built, so a malformed table fails here and never while
matching.
"""

import hashlib
import json
import logging
import threading
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any

from uaclassify.classification.fields import compile_pattern, decode_field_spec, pattern_source
from uaclassify.classification.mappings import MAPPING_TABLES, MappingTable
from uaclassify.classification.matcher import Rule, RuleGroup
from uaclassify.classification.regexes import DEFAULT_RULES
from uaclassify.classification.transforms import TRANSFORMS, TransformFunction
from uaclassify.core.models import Category, RuleSetError

logger = logging.getLogger("uaclassify.classification.rules")

METADATA_KEYS = ("version", "last_updated", "generated")


def _is_rule_pair(entry: Any) -> bool:
    # [patterns, specs] where patterns is a list or a single pattern string
    return (
        isinstance(entry, (list, tuple))
        and len(entry) == 2
        and isinstance(entry[0], (str, list, tuple))
        and isinstance(entry[1], (list, tuple))
    )


def split_rule_pairs(category: str, entries: list[Any]) -> list[tuple[Any, Any]]:
    """Normalize a category's entries into (patterns, specs) pairs.

    Accepts the paired layout ``[[patterns, specs], ...]`` and the flat
    layout ``[patterns, specs, patterns, specs, ...]``. In the paired
    layout a rule's patterns may also be a single pattern string.
    """
    if not entries:
        return []

    if _is_rule_pair(entries[0]):
        pairs = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise RuleSetError(
                    f"{category}[{index}]: rule must be a [patterns, field_specs] pair"
                )
            pairs.append((entry[0], entry[1]))
        return pairs

    if len(entries) % 2:
        raise RuleSetError(
            f"{category}: flat rule list must alternate patterns and field specs "
            f"(got {len(entries)} entries)"
        )
    return [(entries[i], entries[i + 1]) for i in range(0, len(entries), 2)]


def compile_rule(
    patterns: Any,
    specs: Any,
    transforms: Mapping[str, TransformFunction] = TRANSFORMS,
    mappings: Mapping[str, MappingTable] = MAPPING_TABLES,
    strict_transforms: bool = False,
) -> Rule:
    """Compile one rule from its encoded patterns and field specs.

    Raises:
        RuleSetError: If the rule is malformed.
    """
    if isinstance(patterns, str):
        patterns = [patterns]
    if not isinstance(patterns, (list, tuple)) or not patterns:
        raise RuleSetError("patterns must be a non-empty list")
    if not isinstance(specs, (list, tuple)):
        raise RuleSetError("field specs must be a list")

    compiled = tuple(compile_pattern(p) for p in patterns)
    fields = tuple(
        decode_field_spec(spec, transforms, mappings, strict_transforms) for spec in specs
    )
    return Rule(patterns=compiled, fields=fields)


def compile_group(
    category: str,
    entries: Any,
    transforms: Mapping[str, TransformFunction] = TRANSFORMS,
    mappings: Mapping[str, MappingTable] = MAPPING_TABLES,
    strict_transforms: bool = False,
) -> RuleGroup:
    """Compile the ordered rule group of one category.

    Raises:
        RuleSetError: If any rule is malformed; the message names the
            category and rule index.
    """
    if not isinstance(entries, (list, tuple)):
        raise RuleSetError(f"{category}: rules must be a list, got {type(entries).__name__}")

    rules = []
    for index, (patterns, specs) in enumerate(split_rule_pairs(category, list(entries))):
        try:
            rules.append(compile_rule(patterns, specs, transforms, mappings, strict_transforms))
        except RuleSetError as e:
            raise RuleSetError(f"{category}[{index}]: {e}") from e
    return tuple(rules)


class RuleSet:
    """Compiled rule groups for every category.

    A RuleSet never changes after construction and can be shared by any
    number of parsers and threads.

    Example:
        rule_set = RuleSet.load_from_file(Path("rules/custom.json"))
        parser = UAParser(user_agent, rule_set=rule_set)
    """

    def __init__(
        self,
        groups: Mapping[Category, RuleGroup],
        version: str = "unknown",
        last_updated: str = "unknown",
        source: Path | None = None,
        file_hash: str | None = None,
    ) -> None:
        """Initialize a rule set from compiled groups.

        Args:
            groups: Rule group per category; missing categories are empty.
            version: Version string of the rule table.
            last_updated: Last update date of the rule table.
            source: File the table was loaded from, if any.
            file_hash: SHA256 of the source file, if computed.
        """
        self._groups: Mapping[Category, RuleGroup] = MappingProxyType(
            {category: tuple(groups.get(category, ())) for category in Category}
        )
        self.version = version
        self.last_updated = last_updated
        self.source = source
        self.file_hash = file_hash

    @classmethod
    def from_document(
        cls,
        data: Mapping[str, Any],
        transforms: Mapping[str, TransformFunction] = TRANSFORMS,
        mappings: Mapping[str, MappingTable] = MAPPING_TABLES,
        strict_transforms: bool = False,
        source: Path | None = None,
        file_hash: str | None = None,
    ) -> "RuleSet":
        """Build a rule set from a decoded rule table document.

        Args:
            data: Category name -> rules, plus optional metadata keys.
            transforms: Registry used to resolve transform names.
            mappings: Tables available to mapping lookups.
            strict_transforms: Reject tokens that differ from a transform
                name only by case.
            source: File the document was read from, if any.
            file_hash: SHA256 of that file, if computed.

        Returns:
            Compiled RuleSet.

        Raises:
            RuleSetError: If the document is malformed.
        """
        if not isinstance(data, Mapping):
            raise RuleSetError(
                f"Rule table must be an object keyed by category, got {type(data).__name__}"
            )

        groups: dict[Category, RuleGroup] = {}
        for key, entries in data.items():
            if key in METADATA_KEYS:
                continue
            try:
                category = Category.from_name(key)
            except ValueError:
                logger.warning(f"Ignoring unknown rule table key: {key}")
                continue
            groups[category] = compile_group(
                category.value, entries, transforms, mappings, strict_transforms
            )

        return cls(
            groups,
            version=str(data.get("version", "unknown")),
            last_updated=str(data.get("last_updated", "unknown")),
            source=source,
            file_hash=file_hash,
        )

    @classmethod
    def load_from_file(
        cls,
        file_path: Path,
        verify_hash: bool = False,
        expected_hash: str | None = None,
        transforms: Mapping[str, TransformFunction] = TRANSFORMS,
        mappings: Mapping[str, MappingTable] = MAPPING_TABLES,
        strict_transforms: bool = False,
    ) -> "RuleSet":
        """Load a rule set from a JSON file.

        Args:
            file_path: Path to the rule table JSON file.
            verify_hash: Whether to verify the file hash.
            expected_hash: Expected SHA256 hash of the file.
            transforms: Registry used to resolve transform names.
            mappings: Tables available to mapping lookups.
            strict_transforms: Reject near-miss transform names.

        Returns:
            Compiled RuleSet.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If hash verification fails or JSON is invalid.
            RuleSetError: If the rule table is malformed.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Rule file not found: {file_path}")

        content = file_path.read_text(encoding="utf-8")

        file_hash = None
        if verify_hash:
            file_hash = hashlib.sha256(content.encode()).hexdigest()
            if expected_hash and file_hash != expected_hash:
                raise ValueError(
                    f"Rule file hash mismatch. Expected: {expected_hash}, Got: {file_hash}"
                )

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in rule file: {e}") from e

        rule_set = cls.from_document(
            data,
            transforms=transforms,
            mappings=mappings,
            strict_transforms=strict_transforms,
            source=file_path,
            file_hash=file_hash,
        )
        logger.info(
            f"Loaded {rule_set.count} rules from {file_path} (version: {rule_set.version})"
        )
        return rule_set

    def group(self, category: Category) -> RuleGroup:
        """Get the ordered rule group of a category."""
        return self._groups[category]

    @property
    def groups(self) -> Mapping[Category, RuleGroup]:
        """Read-only view of all rule groups."""
        return self._groups

    @property
    def count(self) -> int:
        """Get total number of rules."""
        return sum(len(group) for group in self._groups.values())

    def count_by_category(self) -> dict[str, int]:
        """Get the number of rules per category."""
        return {category.value: len(group) for category, group in self._groups.items()}

    def to_document(self) -> dict[str, Any]:
        """Convert the rule set back to a rule table document."""
        document: dict[str, Any] = {
            "version": self.version,
            "last_updated": self.last_updated,
        }
        for category, group in self._groups.items():
            document[category.value] = [
                [
                    [pattern_source(pattern) for pattern in rule.patterns],
                    [spec.encode() for spec in rule.fields],
                ]
                for rule in group
            ]
        return document

    def export_to_file(self, file_path: Path) -> None:
        """Export the rule set to a JSON file.

        Args:
            file_path: Path to write to.
        """
        output = self.to_document()
        output["generated"] = datetime.now().isoformat()

        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(output, indent=2), encoding="utf-8")

    def get_version_info(self) -> dict[str, Any]:
        """Get version metadata for the rule set.

        Returns:
            Dictionary with version, source, hash and rule counts.
        """
        return {
            "version": self.version,
            "last_updated": self.last_updated,
            "source": str(self.source) if self.source else "built-in",
            "hash": self.file_hash,
            "total_rules": self.count,
            "rules": self.count_by_category(),
        }


_default_rule_set: RuleSet | None = None
_default_lock = threading.Lock()


def get_default_rule_set() -> RuleSet:
    """Get the shared rule set built from the built-in rule table.

    The table is compiled on first use, exactly once even when several
    threads ask for it at the same time.
    """
    global _default_rule_set

    if _default_rule_set is None:
        with _default_lock:
            if _default_rule_set is None:
                _default_rule_set = RuleSet.from_document(DEFAULT_RULES)
                logger.debug(f"Compiled built-in rule table ({_default_rule_set.count} rules)")

    return _default_rule_set
