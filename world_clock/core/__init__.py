"""
Core timezone logic for the World Clock Widget.

Nothing in here draws widgets: the registry, snapshot computation and
application state are plain Python, and the refresh loop only depends on
QtCore for its timer.
"""

from .timezones import (
    DEFAULT_COUNTRIES,
    TimezoneEntry,
    TimezoneNotFoundError,
    TimezoneRegistry,
    default_registry,
)
from .snapshot import ClockSnapshot, compute_snapshot, format_time_in_zone
from .state import AppState
from .refresh import RefreshLoop, RefreshState

__all__ = [
    "DEFAULT_COUNTRIES",
    "TimezoneEntry",
    "TimezoneNotFoundError",
    "TimezoneRegistry",
    "default_registry",
    "ClockSnapshot",
    "compute_snapshot",
    "format_time_in_zone",
    "AppState",
    "RefreshLoop",
    "RefreshState",
]
