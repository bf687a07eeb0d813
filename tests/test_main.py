"""
Tests for application wiring in the entry point.
"""

import logging

import pytest

from world_clock.config import WidgetConfig
from world_clock.main import build_app, configure
from world_clock.ui import tray as tray_module


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


def test_build_app_wires_tray_to_widget(qapp, registry, monkeypatch):
    monkeypatch.setattr(tray_module, "tray_available", lambda: True)
    widget, tray = build_app(registry, WidgetConfig(default_country="UK"))
    try:
        assert tray.widget is widget
        assert not tray.isVisible()
        assert widget.country_box.currentText() == "UK"

        widget.show()
        widget.tray_button.click()
        assert widget.isHidden()
        assert tray.isVisible()
    finally:
        tray.hide()
        widget.close()


def test_config_warnings_reach_log_file(registry, tmp_path, restore_root_logging):
    config = configure(
        registry,
        env={"WORLD_CLOCK_COUNTRY": "Atlantis", "WORLD_CLOCK_LOG_DIR": str(tmp_path)},
    )
    assert config.default_country == "India"
    assert config.log_dir == str(tmp_path)

    log_text = (tmp_path / "world_clock.log").read_text(encoding="utf-8")
    assert "[INFO] World Clock Widget started" in log_text
    assert "[WARNING] Unknown country 'Atlantis'" in log_text
