"""
PyQt6 World Clock Widget window.

A small frameless, draggable window showing the date and time of the
selected country, the converted times of every other registered country, a
dark/light theme toggle and a button to minimize it to the system tray.
"""

from datetime import datetime
from typing import Callable, Optional

from PyQt6.QtCore import QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QCloseEvent, QFont, QMouseEvent
from PyQt6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..config import WidgetConfig
from ..core.refresh import RefreshLoop, utc_now
from ..core.snapshot import ClockSnapshot
from ..core.state import AppState
from ..core.timezones import TimezoneNotFoundError, TimezoneRegistry
from .icon import clock_icon
from .theme import build_stylesheet, theme_for

WINDOW_WIDTH = 360
WINDOW_HEIGHT = 260
OTHER_TIMES_FONT = "Consolas"


def format_date_line(snapshot: ClockSnapshot) -> str:
    return f"Date: {snapshot.date_text}"


def format_main_time_line(snapshot: ClockSnapshot) -> str:
    return f"Time in {snapshot.selected_name}: {snapshot.main_time_text}"


def format_other_times(snapshot: ClockSnapshot) -> str:
    """Render the converted times as an aligned, monospaced block."""
    lines = ["Converted Times:"]
    lines.extend(f"{name:<10} : {time_text}" for name, time_text in snapshot.other_times)
    return "\n".join(lines)


class WorldClockWidget(QWidget):
    """
    Frameless clock window.

    Owns the application state and the refresh loop; the tray is attached
    from outside through the minimize_requested signal. Closing the window
    stops the loop and emits closed, which the app uses to quit.
    """

    minimize_requested = pyqtSignal()
    closed = pyqtSignal()

    def __init__(
        self,
        registry: TimezoneRegistry,
        config: Optional[WidgetConfig] = None,
        clock: Callable[[], datetime] = utc_now,
        parent: Optional[QWidget] = None,
    ) -> None:
        """
        Initialize the widget.

        Args:
            registry: Countries offered in the dropdown.
            config: Start-up settings; defaults are used when omitted.
            clock: Source of the current instant for the refresh loop.
            parent: Optional parent widget.

        Raises:
            TimezoneNotFoundError: If the configured default country is not
                in the registry.
        """
        super().__init__(parent)
        self.registry = registry
        self.config = config or WidgetConfig()
        if self.config.default_country not in registry:
            raise TimezoneNotFoundError(self.config.default_country)
        self.state = AppState(
            selected_country=self.config.default_country,
            dark_mode=self.config.dark_mode,
        )
        self._drag_offset: Optional[QPoint] = None
        self.last_snapshot: Optional[ClockSnapshot] = None

        flags = Qt.WindowType.FramelessWindowHint
        if self.config.always_on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)
        self.setWindowTitle("World Clock Widget")
        self.setWindowIcon(clock_icon())

        self._init_ui()
        self.apply_theme()

        self.refresh_loop = RefreshLoop(
            registry,
            current_selection=lambda: self.state.selected_country,
            on_snapshot=self.show_snapshot,
            clock=clock,
            parent=self,
        )

    def _init_ui(self) -> None:
        """
        Set up the layout: controls on top, date and time in the centre,
        converted times at the bottom.
        """
        outer_layout = QVBoxLayout(self)
        outer_layout.setContentsMargins(0, 0, 0, 0)

        self.frame = QFrame(self)
        self.frame.setObjectName("clockFrame")
        outer_layout.addWidget(self.frame)

        layout = QVBoxLayout(self.frame)
        layout.setContentsMargins(10, 5, 10, 10)
        layout.setSpacing(5)

        # Top row
        top_row = QHBoxLayout()
        top_row.setSpacing(5)
        top_row.addWidget(QLabel("Country:", self.frame))

        self.country_box = QComboBox(self.frame)
        self.country_box.addItems(self.registry.names())
        self.country_box.setCurrentText(self.state.selected_country)
        self.country_box.currentTextChanged.connect(self._on_country_changed)
        top_row.addWidget(self.country_box, 1)
        top_row.addSpacing(5)

        self.theme_button = QPushButton(self.frame)
        self.theme_button.setCheckable(True)
        self.theme_button.setChecked(self.state.dark_mode)
        self.theme_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.theme_button.toggled.connect(self._on_theme_toggled)
        top_row.addWidget(self.theme_button)

        self.tray_button = QPushButton("To Tray", self.frame)
        self.tray_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.tray_button.clicked.connect(self.minimize_requested)
        top_row.addWidget(self.tray_button)
        layout.addLayout(top_row)

        # Date and main time
        self.date_label = QLabel("Date", self.frame)
        self.date_label.setObjectName("dateLabel")
        self.date_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.date_label)

        self.main_time_label = QLabel("Time", self.frame)
        self.main_time_label.setObjectName("mainTimeLabel")
        self.main_time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.main_time_label)

        # Converted times
        self.other_times_label = QLabel(self.frame)
        self.other_times_label.setObjectName("otherTimesLabel")
        # Fixed pitch keeps the name column aligned when Consolas is missing
        other_times_font = QFont(OTHER_TIMES_FONT)
        other_times_font.setStyleHint(QFont.StyleHint.Monospace)
        other_times_font.setFixedPitch(True)
        other_times_font.setPixelSize(14)
        self.other_times_label.setFont(other_times_font)
        self.other_times_label.setAlignment(
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop
        )
        layout.addWidget(self.other_times_label, 1)

        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.move(*self.config.position)

    def apply_theme(self) -> None:
        """Restyle the window for the current dark/light mode."""
        theme = theme_for(self.state.dark_mode)
        self.theme_button.setText(theme.name)
        self.setStyleSheet(build_stylesheet(theme))

    def show_snapshot(self, snapshot: ClockSnapshot) -> None:
        """Render a snapshot pushed by the refresh loop."""
        self.last_snapshot = snapshot
        self.date_label.setText(format_date_line(snapshot))
        self.main_time_label.setText(format_main_time_line(snapshot))
        self.other_times_label.setText(format_other_times(snapshot))

    def _on_country_changed(self, name: str) -> None:
        self.state.select(name, self.registry)
        # Redraw now rather than waiting for the next tick
        self.refresh_loop.refresh_now()

    def _on_theme_toggled(self, checked: bool) -> None:
        self.state.set_dark_mode(checked)
        self.apply_theme()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.refresh_loop.stop()
        self.closed.emit()
        super().closeEvent(event)

    # Dragging
    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_offset = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._drag_offset is not None and event.buttons() & Qt.MouseButton.LeftButton:
            self.move(event.globalPosition().toPoint() - self._drag_offset)
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self._drag_offset = None
        super().mouseReleaseEvent(event)
