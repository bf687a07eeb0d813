"""
Dark and light colour palettes for the widget.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    foreground_main: str
    foreground_secondary: str
    border: str


DARK_THEME = Theme(
    name="Dark",
    background="#000000",
    foreground_main="#ffffff",
    foreground_secondary="#c0c0c0",
    border="rgb(80, 80, 80)",
)

LIGHT_THEME = Theme(
    name="Light",
    background="#ffffff",
    foreground_main="#000000",
    foreground_secondary="#404040",
    border="rgb(180, 180, 180)",
)


def theme_for(dark_mode: bool) -> Theme:
    return DARK_THEME if dark_mode else LIGHT_THEME


def build_stylesheet(theme: Theme) -> str:
    """Return the Qt stylesheet for the widget frame and its children."""
    return f"""
        QFrame#clockFrame {{
            background: {theme.background};
            border: 1px solid {theme.border};
        }}
        QLabel {{
            color: {theme.foreground_main};
            background: transparent;
        }}
        QLabel#dateLabel {{
            font-family: "Segoe UI";
            font-size: 16pt;
            font-weight: bold;
        }}
        QLabel#mainTimeLabel {{
            font-family: "Segoe UI";
            font-size: 24pt;
            font-weight: bold;
        }}
        QLabel#otherTimesLabel {{
            color: {theme.foreground_secondary};
        }}
        QPushButton {{
            color: {theme.foreground_main};
            background: {theme.background};
            border: 1px solid {theme.border};
            padding: 2px 6px;
        }}
    """
