"""
Configuration for the World Clock Widget.

Settings come from environment variables, optionally loaded from a .env file
by python-dotenv. They are read once at start-up and never written back.
"""

from dataclasses import dataclass
import logging
import os
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from .core.timezones import TimezoneRegistry

APPDATA = os.getenv("APPDATA") or os.path.expanduser("~/.config")
DEFAULT_LOG_DIR = os.path.join(APPDATA, "WorldClock")

DEFAULT_COUNTRY = "India"
DEFAULT_POSITION = (50, 50)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WidgetConfig:
    """Start-up settings for the widget window."""

    default_country: str = DEFAULT_COUNTRY
    dark_mode: bool = True
    always_on_top: bool = True
    position: Tuple[int, int] = DEFAULT_POSITION
    log_dir: str = DEFAULT_LOG_DIR


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    logger.warning(f"Ignoring invalid boolean value {value!r}, using {default}")
    return default


def _parse_theme(value: Optional[str]) -> bool:
    if value is None or not value.strip():
        return True
    normalized = value.strip().lower()
    if normalized in ("dark", "light"):
        return normalized == "dark"
    logger.warning(f"Unknown theme {value!r}, falling back to dark")
    return True


def _parse_position(value: Optional[str]) -> Tuple[int, int]:
    if value is None or not value.strip():
        return DEFAULT_POSITION
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError:
        logger.warning(f"Invalid position {value!r}, expected 'x,y'")
        return DEFAULT_POSITION
    return x, y


def log_dir_from_env(env: Optional[Mapping[str, str]] = None) -> str:
    """Return the log directory, resolved before the rest of the config so
    that config warnings can already go to the log file."""
    if env is None:
        env = os.environ
    return os.path.expanduser(env.get("WORLD_CLOCK_LOG_DIR") or DEFAULT_LOG_DIR)


def load_config(
    registry: TimezoneRegistry, env: Optional[Mapping[str, str]] = None
) -> WidgetConfig:
    """
    Build the widget configuration from the environment.

    Args:
        registry: Used to validate the configured default country.
        env: Mapping to read from instead of os.environ (for tests).

    Returns:
        A WidgetConfig with invalid values replaced by defaults.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    country = env.get("WORLD_CLOCK_COUNTRY", "").strip() or DEFAULT_COUNTRY
    if country not in registry:
        logger.warning(
            f"Unknown country {country!r} in WORLD_CLOCK_COUNTRY, using {registry.names()[0]}"
        )
        country = registry.names()[0]

    return WidgetConfig(
        default_country=country,
        dark_mode=_parse_theme(env.get("WORLD_CLOCK_THEME")),
        always_on_top=_parse_bool(env.get("WORLD_CLOCK_ALWAYS_ON_TOP"), True),
        position=_parse_position(env.get("WORLD_CLOCK_POSITION")),
        log_dir=log_dir_from_env(env),
    )
