"""Mapping Tables - alias tables for captured version tokens.

A mapping table translates a raw token (for example a Windows NT version
or a legacy Safari build number) into a canonical label by ordered
substring containment.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

# Keyword marking a 3-element field spec as a mapping lookup
MAPPING_KEYWORD = "mapping"


@dataclass(frozen=True)
class MappingTable:
    """A named, ordered mapping from canonical label to trigger substrings.

    Attributes:
        name: Name referenced by field specs
        entries: (label, triggers) pairs in lookup order
    """

    name: str
    entries: tuple[tuple[str, tuple[str, ...]], ...]

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, str | list[str] | tuple[str, ...]]) -> "MappingTable":
        """Build a table from a label -> trigger(s) mapping, keeping its order."""
        entries = []
        for label, triggers in data.items():
            if isinstance(triggers, str):
                triggers = (triggers,)
            entries.append((label, tuple(triggers)))
        return cls(name=name, entries=tuple(entries))

    def lookup(self, value: str) -> str:
        """Resolve a value to its canonical label.

        Labels are scanned in declared order and the first label with a
        trigger that occurs in the value (case-insensitively) wins. A value
        no trigger matches is returned unchanged.
        """
        haystack = value.lower()
        for label, triggers in self.entries:
            for trigger in triggers:
                if trigger.lower() in haystack:
                    return label
        return value

    def to_dict(self) -> dict[str, str | list[str]]:
        """Convert the table back to its label -> trigger(s) form."""
        return {
            label: triggers[0] if len(triggers) == 1 else list(triggers)
            for label, triggers in self.entries
        }


SAFARI_VERSIONS = MappingTable.from_dict(
    "safari",
    {
        "1.0": "/8",
        "1.2": "/1",
        "1.3": "/3",
        "2.0": "/412",
        "2.0.2": "/416",
        "2.0.3": "/417",
        "2.0.4": "/419",
    },
)

WINDOWS_VERSIONS = MappingTable.from_dict(
    "windows",
    {
        "ME": "4.90",
        "NT 3.11": "NT3.51",
        "NT 4.0": "NT4.0",
        "2000": "NT 5.0",
        "XP": ["NT 5.1", "NT 5.2"],
        "Vista": "NT 6.0",
        "7": "NT 6.1",
        "8": "NT 6.2",
        "8.1": "NT 6.3",
        "10": ["NT 6.4", "NT 10.0"],
        "RT": "ARM",
    },
)

MAPPING_TABLES: Mapping[str, MappingTable] = MappingProxyType(
    {table.name: table for table in (SAFARI_VERSIONS, WINDOWS_VERSIONS)}
)


def lookup(table: MappingTable, value: str) -> str:
    """Resolve a value against a mapping table (see MappingTable.lookup)."""
    return table.lookup(value)


def lookup_by_name(
    table_name: str,
    value: str,
    tables: Mapping[str, MappingTable] = MAPPING_TABLES,
) -> str:
    """Resolve a value against a mapping table referenced by name.

    Raises:
        KeyError: If no table has that name.
    """
    try:
        table = tables[table_name]
    except KeyError:
        raise KeyError(f"Unknown mapping table: {table_name}") from None
    return table.lookup(value)
