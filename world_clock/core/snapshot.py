"""
Clock snapshot computation.

A snapshot is everything the widget shows for one instant: the date and time
in the selected country plus the converted time of every other registered
country. All fields come from the same instant so the main time and the
converted times can never drift apart by a tick.
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Tuple

from dateutil.tz import tzutc

from .timezones import TimezoneRegistry

DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class ClockSnapshot:
    """Formatted date/time strings for one instant."""

    selected_name: str
    date_text: str
    main_time_text: str
    other_times: Tuple[Tuple[str, str], ...]


def _as_instant(now: datetime) -> datetime:
    # Naive datetimes are taken to be UTC rather than machine-local time.
    if now.tzinfo is None or now.utcoffset() is None:
        return now.replace(tzinfo=tzutc())
    return now


def format_time_in_zone(instant: datetime, zone: tzinfo) -> str:
    """Convert an instant to the given zone and format it as HH:MM:SS."""
    return _as_instant(instant).astimezone(zone).strftime(TIME_FORMAT)


def compute_snapshot(
    selected_name: str, now: datetime, registry: TimezoneRegistry
) -> ClockSnapshot:
    """
    Compute the snapshot for the selected country at the given instant.

    Args:
        selected_name: Display name of the selected country.
        now: The instant to render. Naive values are treated as UTC.
        registry: Registry providing the countries and their zones.

    Returns:
        A new ClockSnapshot. The selected country is not part of other_times,
        and the remaining countries keep registry order.

    Raises:
        TimezoneNotFoundError: If selected_name is not registered.
    """
    instant = _as_instant(now)
    local = instant.astimezone(registry.tzinfo_for(selected_name))

    other_times = tuple(
        (
            entry.display_name,
            format_time_in_zone(instant, registry.tzinfo_for(entry.display_name)),
        )
        for entry in registry.entries()
        if entry.display_name != selected_name
    )
    return ClockSnapshot(
        selected_name=selected_name,
        date_text=local.strftime(DATE_FORMAT),
        main_time_text=local.strftime(TIME_FORMAT),
        other_times=other_times,
    )
