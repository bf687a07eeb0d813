"""
Refresh loop for the World Clock Widget.

Drives the once-a-second clock update with a QTimer, so every tick runs on the
Qt main thread alongside the rest of the UI callbacks.
"""

from datetime import datetime
from enum import Enum
import logging
from typing import Callable, Optional

from dateutil.tz import tzutc
from PyQt6.QtCore import QObject, Qt, QTimer

from .snapshot import ClockSnapshot, compute_snapshot
from .timezones import TimezoneRegistry

REFRESH_INTERVAL_MS = 1000


def utc_now() -> datetime:
    """Sample the system clock as an aware UTC instant."""
    return datetime.now(tz=tzutc())


class RefreshState(Enum):
    IDLE = "idle"
    RUNNING = "running"


class RefreshLoop:
    """
    Periodically computes a ClockSnapshot and hands it to the presentation layer.

    The loop reads the current selection through a callback before every
    refresh and pushes the result through another, so it never holds a
    reference to any widget.
    """

    def __init__(
        self,
        registry: TimezoneRegistry,
        current_selection: Callable[[], str],
        on_snapshot: Callable[[ClockSnapshot], None],
        interval_ms: int = REFRESH_INTERVAL_MS,
        clock: Callable[[], datetime] = utc_now,
        parent: Optional[QObject] = None,
    ) -> None:
        """
        Args:
            registry: Countries to render.
            current_selection: Returns the display name to render next.
            on_snapshot: Receives each freshly computed snapshot.
            interval_ms: Tick interval in milliseconds.
            clock: Returns the current instant; injectable for tests.
            parent: Optional Qt parent for the underlying timer.
        """
        self.registry = registry
        self.current_selection = current_selection
        self.on_snapshot = on_snapshot
        self.clock = clock
        self.state = RefreshState.IDLE
        self.logger = logging.getLogger(__name__)

        self.timer = QTimer(parent)
        self.timer.setInterval(interval_ms)
        self.timer.setTimerType(Qt.TimerType.PreciseTimer)
        self.timer.timeout.connect(self.refresh_now)

    @property
    def is_running(self) -> bool:
        return self.state is RefreshState.RUNNING

    def start(self) -> None:
        """Start ticking and render immediately. No-op if already running."""
        if self.is_running:
            return
        self.state = RefreshState.RUNNING
        self.timer.start()
        self.logger.info(f"Refresh loop started ({self.timer.interval()} ms)")
        self.refresh_now()

    def stop(self) -> None:
        """Stop ticking. No-op if already idle."""
        if not self.is_running:
            return
        self.timer.stop()
        self.state = RefreshState.IDLE
        self.logger.info("Refresh loop stopped")

    def refresh_now(self) -> ClockSnapshot:
        """
        Compute a snapshot for the current selection and deliver it.

        Used by the timer and, out of band, whenever the selection changes.

        Raises:
            TimezoneNotFoundError: If the current selection is not registered.
        """
        snapshot = compute_snapshot(self.current_selection(), self.clock(), self.registry)
        self.on_snapshot(snapshot)
        return snapshot
