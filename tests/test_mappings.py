"""Tests for mapping tables."""

import pytest

from uaclassify.classification.mappings import (
    MAPPING_TABLES,
    SAFARI_VERSIONS,
    WINDOWS_VERSIONS,
    MappingTable,
    lookup,
    lookup_by_name,
)


class TestMappingTable:
    """Tests for MappingTable."""

    def test_from_dict_keeps_order(self):
        """Test that labels keep their declared order."""
        table = MappingTable.from_dict("t", {"b": "x", "a": ["y", "z"]})

        assert [label for label, _ in table.entries] == ["b", "a"]
        assert table.entries[1] == ("a", ("y", "z"))

    def test_lookup_substring_match(self):
        """Test that a trigger contained in the value selects its label."""
        table = MappingTable.from_dict("t", {"Label": "abc"})

        assert table.lookup("xxABCxx") == "Label"

    def test_lookup_first_label_wins(self):
        """Test that the first label in declared order wins."""
        table = MappingTable.from_dict("t", {"first": "a", "second": "ab"})

        assert table.lookup("ab") == "first"

    def test_lookup_fallback_returns_input(self):
        """Test that a value no trigger matches is returned unchanged."""
        assert WINDOWS_VERSIONS.lookup("NT 99.9") == "NT 99.9"
        assert SAFARI_VERSIONS.lookup("") == ""

    def test_to_dict_round_trip(self):
        """Test converting a table back to its dictionary form."""
        data = WINDOWS_VERSIONS.to_dict()

        assert data["XP"] == ["NT 5.1", "NT 5.2"]
        assert data["7"] == "NT 6.1"
        assert MappingTable.from_dict("windows", data) == WINDOWS_VERSIONS

    def test_table_is_frozen(self):
        """Test that tables cannot be modified."""
        with pytest.raises(AttributeError):
            WINDOWS_VERSIONS.name = "other"  # type: ignore[misc]


class TestBuiltinTables:
    """Tests for the built-in safari and windows tables."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("NT 6.1", "7"),
            ("NT 5.1", "XP"),
            ("NT 5.2", "XP"),
            ("NT 6.0", "Vista"),
            ("NT 6.3", "8.1"),
            ("NT 10.0", "10"),
            ("nt 6.2", "8"),
            ("4.90", "ME"),
            ("ARM", "RT"),
        ],
    )
    def test_windows_versions(self, token: str, expected: str) -> None:
        """Test Windows NT tokens map to marketing versions."""
        assert lookup(WINDOWS_VERSIONS, token) == expected

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("/85.8", "1.0"),
            ("/125.1", "1.2"),
            ("/312.6", "1.3"),
            ("/412.2", "2.0"),
            ("/419.3", "2.0.4"),
        ],
    )
    def test_safari_versions(self, token: str, expected: str) -> None:
        """Test legacy Safari build numbers map to versions."""
        assert lookup(SAFARI_VERSIONS, token) == expected

    def test_registry_contains_builtin_tables(self):
        """Test the registry exposes both tables read-only."""
        assert set(MAPPING_TABLES) == {"safari", "windows"}
        with pytest.raises(TypeError):
            MAPPING_TABLES["other"] = SAFARI_VERSIONS  # type: ignore[index]


class TestLookupByName:
    """Tests for lookup_by_name()."""

    def test_known_table(self):
        """Test looking up through a table name."""
        assert lookup_by_name("windows", "NT 6.1") == "7"

    def test_unknown_table_raises(self):
        """Test that an unknown table name raises KeyError."""
        with pytest.raises(KeyError, match="Unknown mapping table: nope"):
            lookup_by_name("nope", "value")
