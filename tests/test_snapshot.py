"""
Tests for clock snapshot computation.
"""

from datetime import datetime, timedelta, timezone

import pytest
from dateutil.tz import tzutc

from world_clock.core.snapshot import ClockSnapshot, compute_snapshot, format_time_in_zone
from world_clock.core.timezones import TimezoneEntry, TimezoneNotFoundError, TimezoneRegistry


def test_india_usa_scenario(india_usa_registry, fixed_instant):
    snapshot = compute_snapshot("India", fixed_instant, india_usa_registry)
    assert snapshot == ClockSnapshot(
        selected_name="India",
        date_text="15-01-2024",
        main_time_text="17:30:00",
        other_times=(("USA", "07:00:00"),),
    )


def test_date_follows_selected_zone(registry):
    # 20:00 UTC is already the next day in Tokyo
    instant = datetime(2024, 1, 15, 20, 0, 0, tzinfo=tzutc())
    assert compute_snapshot("Japan", instant, registry).date_text == "16-01-2024"
    assert compute_snapshot("UK", instant, registry).date_text == "15-01-2024"


@pytest.mark.parametrize(
    "name", ["India", "USA", "UK", "Australia", "Japan", "Dubai"]
)
def test_other_times_exclude_selected(registry, fixed_instant, name):
    snapshot = compute_snapshot(name, fixed_instant, registry)
    assert len(snapshot.other_times) == len(registry) - 1
    assert name not in [other for other, _ in snapshot.other_times]


def test_other_times_keep_registry_order(fixed_instant):
    registry = TimezoneRegistry(
        [
            TimezoneEntry("A", "Asia/Kolkata"),
            TimezoneEntry("B", "America/New_York"),
            TimezoneEntry("C", "Europe/London"),
            TimezoneEntry("D", "Asia/Tokyo"),
        ]
    )
    snapshot = compute_snapshot("C", fixed_instant, registry)
    assert [name for name, _ in snapshot.other_times] == ["A", "B", "D"]


def test_same_instant_gives_equal_snapshots(registry, fixed_instant):
    same_instant_elsewhere = fixed_instant.astimezone(timezone(timedelta(hours=9)))
    assert compute_snapshot("UK", fixed_instant, registry) == compute_snapshot(
        "UK", same_instant_elsewhere, registry
    )


def test_main_time_round_trips_through_own_zone(registry, fixed_instant):
    for name in registry.names():
        zone = registry.tzinfo_for(name)
        snapshot = compute_snapshot(name, fixed_instant, registry)
        local = fixed_instant.astimezone(zone)
        assert format_time_in_zone(local, zone) == snapshot.main_time_text


def test_converted_times_use_dst_rules(registry):
    # July: London is on BST, Sydney on AEST, New York on EDT
    instant = datetime(2024, 7, 1, 12, 0, 0, tzinfo=tzutc())
    others = dict(compute_snapshot("India", instant, registry).other_times)
    assert others == {
        "USA": "08:00:00",
        "UK": "13:00:00",
        "Australia": "22:00:00",
        "Japan": "21:00:00",
        "Dubai": "16:00:00",
    }


def test_naive_instant_is_treated_as_utc(india_usa_registry, fixed_instant):
    naive = fixed_instant.replace(tzinfo=None)
    assert compute_snapshot("India", naive, india_usa_registry) == compute_snapshot(
        "India", fixed_instant, india_usa_registry
    )


def test_time_is_zero_padded_24_hour(india_usa_registry):
    instant = datetime(2024, 1, 15, 1, 2, 3, tzinfo=tzutc())
    snapshot = compute_snapshot("USA", instant, india_usa_registry)
    assert snapshot.main_time_text == "20:02:03"
    assert snapshot.date_text == "14-01-2024"
    assert snapshot.other_times == (("India", "06:32:03"),)


def test_unknown_selection_raises(registry, fixed_instant):
    with pytest.raises(TimezoneNotFoundError):
        compute_snapshot("Nonexistent", fixed_instant, registry)
