"""
Timezone registry for the World Clock Widget.

Holds the fixed, ordered list of countries the widget knows about and maps
each display name to its IANA zone id. Zone ids are resolved with
dateutil's tz database so the same lookup works on Windows and Linux.
"""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Dict, Iterable, Iterator, List, Tuple

from dateutil import tz


class TimezoneNotFoundError(KeyError):
    """Raised when a display name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No timezone registered for {self.name!r}"


@dataclass(frozen=True)
class TimezoneEntry:
    """A single selectable country and the IANA zone it maps to."""

    display_name: str
    zone_id: str


# Order matters: it is the dropdown order and the converted-times order.
DEFAULT_COUNTRIES: Tuple[TimezoneEntry, ...] = (
    TimezoneEntry("India", "Asia/Kolkata"),
    TimezoneEntry("USA", "America/New_York"),
    TimezoneEntry("UK", "Europe/London"),
    TimezoneEntry("Australia", "Australia/Sydney"),
    TimezoneEntry("Japan", "Asia/Tokyo"),
    TimezoneEntry("Dubai", "Asia/Dubai"),
)


class TimezoneRegistry:
    """
    Immutable, ordered mapping from display name to timezone.

    The registry is built once and never changes afterwards. Every zone id is
    resolved at construction time so a typo fails at start-up instead of on
    the first clock tick.
    """

    def __init__(self, entries: Iterable[TimezoneEntry]) -> None:
        """
        Build the registry.

        Args:
            entries: Entries in display order.

        Raises:
            ValueError: If a display name is repeated or a zone id is unknown.
        """
        self._entries: Tuple[TimezoneEntry, ...] = tuple(entries)
        self._zones: Dict[str, tzinfo] = {}
        for entry in self._entries:
            if entry.display_name in self._zones:
                raise ValueError(f"Duplicate display name: {entry.display_name!r}")
            # gettz("") returns the local zone, which is never what we want here
            zone = tz.gettz(entry.zone_id) if entry.zone_id else None
            if zone is None:
                raise ValueError(
                    f"Unknown timezone {entry.zone_id!r} for {entry.display_name!r}"
                )
            self._zones[entry.display_name] = zone

    def entries(self) -> Tuple[TimezoneEntry, ...]:
        """Return all entries in registry order."""
        return self._entries

    def names(self) -> List[str]:
        """Return the display names in registry order."""
        return [entry.display_name for entry in self._entries]

    def zone_id_for(self, name: str) -> str:
        """
        Look up the IANA zone id for a display name.

        Raises:
            TimezoneNotFoundError: If the name is not registered.
        """
        for entry in self._entries:
            if entry.display_name == name:
                return entry.zone_id
        raise TimezoneNotFoundError(name)

    def tzinfo_for(self, name: str) -> tzinfo:
        """Return the resolved tzinfo for a display name."""
        try:
            return self._zones[name]
        except KeyError:
            raise TimezoneNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._zones

    def __iter__(self) -> Iterator[TimezoneEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TimezoneRegistry({self.names()!r})"


def default_registry() -> TimezoneRegistry:
    """Create the registry with the built-in country list."""
    return TimezoneRegistry(DEFAULT_COUNTRIES)
