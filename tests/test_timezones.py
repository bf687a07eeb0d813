"""
Tests for the timezone registry.
"""

import pytest

from world_clock.core.timezones import (
    DEFAULT_COUNTRIES,
    TimezoneEntry,
    TimezoneNotFoundError,
    TimezoneRegistry,
)


def test_default_registry_keeps_literal_order(registry):
    assert registry.names() == ["India", "USA", "UK", "Australia", "Japan", "Dubai"]
    assert registry.entries() == DEFAULT_COUNTRIES
    assert len(registry) == 6


def test_zone_id_lookup(registry):
    assert registry.zone_id_for("India") == "Asia/Kolkata"
    assert registry.zone_id_for("Australia") == "Australia/Sydney"
    assert "Japan" in registry
    assert "Mars" not in registry


def test_unknown_name_raises_not_found(registry):
    with pytest.raises(TimezoneNotFoundError) as excinfo:
        registry.zone_id_for("Nonexistent")
    assert excinfo.value.name == "Nonexistent"
    with pytest.raises(TimezoneNotFoundError):
        registry.tzinfo_for("Nonexistent")


def test_not_found_is_a_key_error(registry):
    with pytest.raises(KeyError):
        registry.zone_id_for("Nonexistent")


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        TimezoneRegistry(
            [TimezoneEntry("UK", "Europe/London"), TimezoneEntry("UK", "Europe/Dublin")]
        )


@pytest.mark.parametrize("zone_id", ["Not/AZone", ""])
def test_unknown_zone_rejected(zone_id):
    with pytest.raises(ValueError, match="Unknown timezone"):
        TimezoneRegistry([TimezoneEntry("Nowhere", zone_id)])


def test_entries_are_immutable():
    entry = TimezoneEntry("Japan", "Asia/Tokyo")
    with pytest.raises(AttributeError):
        entry.zone_id = "Asia/Seoul"
