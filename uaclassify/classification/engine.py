"""Classification Engine - the parser facade.

A UAParser holds one input string and a shared rule set. Each accessor
runs the matcher for its category and applies that category's
post-processing; nothing is cached between calls.
"""

import logging
import os
from typing import Any

from uaclassify.classification.matcher import match
from uaclassify.classification.postprocess import process_browser, process_device, process_os
from uaclassify.classification.regexes import DEFAULT_RULES
from uaclassify.classification.rules import RuleSet, get_default_rule_set
from uaclassify.core.config import DEFAULT_USER_AGENT_ENV_VAR, Config
from uaclassify.core.models import Category, CategoryRecord, ParseResult

logger = logging.getLogger("uaclassify.classification.engine")


class UAParser:
    """Classifies one user agent string.

    Example:
        parser = UAParser("Mozilla/5.0 (Linux; Android 5.0.2; SM-G925F) ...")
        print(parser.get_os())      # {'name': 'Android', 'version': '5.0.2'}
        print(parser.get_device())  # {'vendor': 'Samsung', ...}
    """

    def __init__(
        self,
        user_agent: str | None = None,
        rule_set: RuleSet | None = None,
        env_var: str = DEFAULT_USER_AGENT_ENV_VAR,
    ) -> None:
        """Initialize the parser.

        Args:
            user_agent: String to classify. If None, the value of the
                environment variable ``env_var`` is used (empty if unset).
            rule_set: Rule set to classify with. Defaults to the shared
                built-in rule set.
            env_var: Environment variable read when no string is given.
        """
        if user_agent is None:
            user_agent = os.environ.get(env_var, "")
        self._user_agent = user_agent
        self._rule_set = rule_set or get_default_rule_set()

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def _match(self, category: Category) -> CategoryRecord:
        return match(self._rule_set.group(category), self._user_agent, category.fields)

    def get_ua(self) -> str:
        """Get the string being classified."""
        return self._user_agent

    def get_browser(self) -> CategoryRecord:
        """Get browser name, version and major version."""
        return process_browser(self._match(Category.BROWSER))

    def get_engine(self) -> CategoryRecord:
        """Get rendering engine name and version."""
        return self._match(Category.ENGINE)

    def get_os(self) -> CategoryRecord:
        """Get operating system name and version."""
        return process_os(self._match(Category.OS))

    def get_cpu(self) -> CategoryRecord:
        """Get CPU architecture."""
        return self._match(Category.CPU)

    def get_device(self) -> CategoryRecord:
        """Get device vendor, model and type.

        The OS is classified again so that Android devices without a
        recognized model still get a vendor and form factor.
        """
        return process_device(self._match(Category.DEVICE), self.get_os())

    def get(self, category: Category) -> CategoryRecord:
        """Get the record of any category."""
        accessors = {
            Category.BROWSER: self.get_browser,
            Category.ENGINE: self.get_engine,
            Category.OS: self.get_os,
            Category.CPU: self.get_cpu,
            Category.DEVICE: self.get_device,
        }
        return accessors[category]()

    def parse(self) -> ParseResult:
        """Classify every category.

        Returns:
            ParseResult with one record per category.
        """
        result = ParseResult(
            input=self._user_agent,
            browser=self.get_browser(),
            engine=self.get_engine(),
            os=self.get_os(),
            device=self.get_device(),
            cpu=self.get_cpu(),
        )
        logger.debug(f"Classified {self._user_agent!r}")
        return result

    def get_result(self) -> dict[str, Any]:
        """Get the aggregate result as a dictionary.

        Returns:
            Dictionary with the input string under "input" and one record
            per category.
        """
        return self.parse().to_dict()


def create_default_parser(
    user_agent: str | None = None,
    config: Config | None = None,
) -> UAParser:
    """Create a parser configured from a Config.

    Args:
        user_agent: String to classify; see UAParser.
        config: Configuration. Defaults to the built-in defaults.

    Returns:
        Configured UAParser.

    Raises:
        FileNotFoundError: If the configured rule file doesn't exist.
        ValueError: If the rule file is invalid or fails hash verification.
    """
    config = config or Config()

    rule_set = None
    rules_path = config.rules_path
    if rules_path is not None:
        rule_set = RuleSet.load_from_file(
            rules_path,
            verify_hash=config.parser.verify_hash,
            expected_hash=config.parser.expected_hash or None,
            strict_transforms=config.parser.strict_transforms,
        )
    elif config.parser.strict_transforms:
        # The shared rule set is built leniently
        rule_set = RuleSet.from_document(DEFAULT_RULES, strict_transforms=True)

    return UAParser(
        user_agent,
        rule_set=rule_set,
        env_var=config.parser.user_agent_env_var,
    )
