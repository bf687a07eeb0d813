"""
Main entry point for the World Clock Widget.

Launches the PyQt6 clock window and its system tray integration.
"""

import getpass
import logging
import os
import sys
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv
from PyQt6.QtWidgets import QApplication

from .config import WidgetConfig, load_config, log_dir_from_env
from .core.timezones import TimezoneRegistry, default_registry
from .ui.tray import WorldClockTray
from .ui.widget import WorldClockWidget

load_dotenv()


def setup_logging(log_dir: str) -> None:
    """Configure file-based logging for the application."""
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, "world_clock.log")
    logging.basicConfig(
        level=logging.INFO,
        force=True,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    logging.info(f"World Clock Widget started by user={getpass.getuser()}")


def configure(
    registry: TimezoneRegistry, env: Optional[Mapping[str, str]] = None
) -> WidgetConfig:
    """Set up logging first, then load the config so its warnings are logged."""
    setup_logging(log_dir_from_env(env))
    return load_config(registry, env)


def build_app(
    registry: TimezoneRegistry, config: WidgetConfig
) -> Tuple[WorldClockWidget, WorldClockTray]:
    """Create the widget and its tray icon, wired together but not yet shown."""
    widget = WorldClockWidget(registry, config)
    tray = WorldClockTray(widget)
    widget.minimize_requested.connect(tray.minimize_widget)
    return widget, tray


def main() -> None:
    """
    Start the World Clock Widget with its tray icon.
    """
    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)

    registry = default_registry()
    config = configure(registry)

    widget, tray = build_app(registry, config)
    app.aboutToQuit.connect(widget.refresh_loop.stop)
    # The tray icon is hidden while the widget is shown, so closing it must quit
    widget.closed.connect(app.quit)
    widget.show()
    widget.refresh_loop.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
