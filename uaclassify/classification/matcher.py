"""Matcher - first-match-wins evaluation of a rule group.

Rules are tried in declaration order and, within a rule, alternative
patterns are tried in declaration order. The first pattern that matches
decides the whole record; nothing after it is evaluated.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from uaclassify.classification.fields import FieldSpec
from uaclassify.core.models import SENTINEL, CategoryRecord

logger = logging.getLogger("uaclassify.classification.matcher")


@dataclass(frozen=True)
class Rule:
    """Alternative patterns plus the field specs applied on a match.

    Attributes:
        patterns: Compiled alternatives, tried in order
        fields: One spec per capture slot, in capture order
    """

    patterns: tuple[re.Pattern[str], ...]
    fields: tuple[FieldSpec, ...]

    def search(self, user_agent: str) -> re.Match[str] | None:
        """Return the match of the first alternative that matches, if any."""
        for pattern in self.patterns:
            match = pattern.search(user_agent)
            if match:
                return match
        return None

    def extract(self, match: re.Match[str], record: CategoryRecord) -> None:
        """Write the fields of this rule into a record.

        The p-th spec consumes capture p whatever its kind, so literal
        specs keep later specs aligned with their capture groups. Specs
        beyond the last capture group see an absent capture.
        """
        captures = match.groups()
        for position, spec in enumerate(self.fields):
            capture = captures[position] if position < len(captures) else None
            record[spec.name] = spec.resolve(capture)


RuleGroup = tuple[Rule, ...]


def match(group: Sequence[Rule], user_agent: str, fields: Sequence[str]) -> CategoryRecord:
    """Classify a string against one category's rule group.

    Args:
        group: Rules in precedence order.
        user_agent: String to classify.
        fields: Field names of the category record.

    Returns:
        Record filled by the first matching rule, or every field set to
        the sentinel when no rule matches.
    """
    record: CategoryRecord = {name: SENTINEL for name in fields}

    for index, rule in enumerate(group):
        found = rule.search(user_agent)
        if found is None:
            continue
        rule.extract(found, record)
        logger.debug(f"Rule {index} matched {found.group(0)!r}")
        break

    return record
