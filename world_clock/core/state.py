"""
Application state for the World Clock Widget.
"""

from dataclasses import dataclass
import logging

from .timezones import TimezoneNotFoundError, TimezoneRegistry

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Mutable UI state owned by the widget.

    Only touched from the Qt main thread, so no locking is needed.
    """

    selected_country: str
    dark_mode: bool = True

    def select(self, name: str, registry: TimezoneRegistry) -> None:
        """
        Change the selected country after checking it against the registry.

        Raises:
            TimezoneNotFoundError: If name is not registered. The previous
                selection is kept.
        """
        if name not in registry:
            raise TimezoneNotFoundError(name)
        if name != self.selected_country:
            logger.info(f"Country changed: {self.selected_country} -> {name}")
        self.selected_country = name

    def set_dark_mode(self, dark_mode: bool) -> None:
        """Switch between the dark and light theme."""
        if dark_mode != self.dark_mode:
            logger.info(f"Theme changed to {'dark' if dark_mode else 'light'}")
        self.dark_mode = dark_mode
