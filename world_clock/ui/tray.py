"""
PyQt6 System Tray Integration for the World Clock Widget.

Minimizing to the tray hides the widget and shows the tray icon; opening it
again removes the icon and brings the widget back to the front.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMenu, QSystemTrayIcon, QWidget

from .icon import clock_icon

TRAY_TOOLTIP = "World Clock Widget"

logger = logging.getLogger(__name__)


def tray_available() -> bool:
    """Return True if the platform has a system tray to dock into."""
    return QSystemTrayIcon.isSystemTrayAvailable()


class WorldClockTray(QSystemTrayIcon):
    """
    System tray icon and menu for the World Clock Widget.
    """

    def __init__(self, widget: QWidget, parent: Optional[QWidget] = None) -> None:
        """
        Initialize the tray icon and its menu. The icon stays hidden until the
        widget is minimized to the tray.

        Args:
            widget: The clock widget to hide and restore.
            parent: Optional parent widget.
        """
        super().__init__(clock_icon(), parent)
        self.widget = widget
        self.setToolTip(TRAY_TOOLTIP)
        self.menu = QMenu(parent)
        self._init_menu()
        self.setContextMenu(self.menu)
        self.activated.connect(self._on_activated)

    def _init_menu(self) -> None:
        open_action = QAction("Open", self)
        open_action.triggered.connect(self.restore_widget)
        exit_action = QAction("Exit", self)
        exit_action.triggered.connect(self.on_exit)
        self.menu.addAction(open_action)
        self.menu.addAction(exit_action)

    def _on_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason in (
            QSystemTrayIcon.ActivationReason.Trigger,
            QSystemTrayIcon.ActivationReason.DoubleClick,
        ):
            self.restore_widget()

    def minimize_widget(self) -> None:
        """
        Hide the widget and dock it in the tray.

        Without a system tray the widget is minimized like a normal window.
        """
        if not tray_available():
            logger.warning("System tray not available, minimizing window instead")
            self.widget.showMinimized()
            return
        self.show()
        self.widget.hide()
        self.notify(TRAY_TOOLTIP, "Still running here. Click the icon to restore.")
        logger.info("Widget minimized to tray")

    def restore_widget(self) -> None:
        """Remove the tray icon and bring the widget back to the front."""
        self.hide()
        self.widget.showNormal()
        self.widget.raise_()
        self.widget.activateWindow()
        logger.info("Widget restored from tray")

    def notify(self, title: str, message: str) -> None:
        """Show a balloon message next to the tray icon."""
        if self.isVisible() and self.supportsMessages():
            self.showMessage(title, message, QSystemTrayIcon.MessageIcon.Information, 3000)

    def on_exit(self) -> None:
        """Handle the Exit action."""
        self.hide()
        QCoreApplication.quit()
