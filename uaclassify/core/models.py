"""Core data models for uaclassify.

This module defines the categories, record shapes and result types used
throughout the application.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Value of every field that no rule has set
SENTINEL = ""


class RuleSetError(ValueError):
    """Raised when a rule table cannot be turned into a usable rule set."""


class Category(Enum):
    """Attribute categories extracted from a user agent string."""

    BROWSER = "browser"
    ENGINE = "engine"
    OS = "os"
    CPU = "cpu"
    DEVICE = "device"

    @property
    def fields(self) -> tuple[str, ...]:
        """Field names of a record for this category."""
        return CATEGORY_FIELDS[self]

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """Look up a category by its lower-case name.

        Raises:
            ValueError: If the name is not a known category.
        """
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category '{name}', must be one of: {valid}") from None


CATEGORY_FIELDS: dict[Category, tuple[str, ...]] = {
    Category.BROWSER: ("name", "version", "major"),
    Category.ENGINE: ("name", "version"),
    Category.OS: ("name", "version"),
    Category.CPU: ("architecture",),
    Category.DEVICE: ("vendor", "model", "type"),
}

# Field name -> string value
CategoryRecord = dict[str, str]


def empty_record(category: Category) -> CategoryRecord:
    """Create a record for a category with every field set to the sentinel."""
    return {name: SENTINEL for name in category.fields}


@dataclass
class ParseResult:
    """Full classification of one user agent string.

    Attributes:
        input: The classified string
        browser: Browser name, version and major version
        engine: Rendering engine name and version
        os: Operating system name and version
        device: Device vendor, model and type
        cpu: CPU architecture
    """

    input: str
    browser: CategoryRecord = field(default_factory=lambda: empty_record(Category.BROWSER))
    engine: CategoryRecord = field(default_factory=lambda: empty_record(Category.ENGINE))
    os: CategoryRecord = field(default_factory=lambda: empty_record(Category.OS))
    device: CategoryRecord = field(default_factory=lambda: empty_record(Category.DEVICE))
    cpu: CategoryRecord = field(default_factory=lambda: empty_record(Category.CPU))

    def get(self, category: Category) -> CategoryRecord:
        """Get the record for a category."""
        return getattr(self, category.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a dictionary for JSON serialization."""
        return {
            "input": self.input,
            "browser": dict(self.browser),
            "engine": dict(self.engine),
            "os": dict(self.os),
            "device": dict(self.device),
            "cpu": dict(self.cpu),
        }
