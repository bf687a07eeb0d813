"""
Shared fixtures for the World Clock Widget tests.
"""

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import datetime

import pytest
from dateutil.tz import tzutc
from PyQt6.QtWidgets import QApplication

from world_clock.core.timezones import TimezoneEntry, TimezoneRegistry, default_registry


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def registry() -> TimezoneRegistry:
    return default_registry()


@pytest.fixture
def india_usa_registry() -> TimezoneRegistry:
    return TimezoneRegistry(
        [
            TimezoneEntry("India", "Asia/Kolkata"),
            TimezoneEntry("USA", "America/New_York"),
        ]
    )


@pytest.fixture
def fixed_instant() -> datetime:
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=tzutc())
