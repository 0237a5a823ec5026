"""
Settings / Entry Point Tests

Run with: pytest tests/test_settings.py -v
"""

import importlib
import logging

import main
import settings


def test_settings_and_hud_import_cleanly():
    importlib.reload(settings)
    hud_module = importlib.import_module("systems.hud")
    assert hud_module.Hud is not None


def test_hud_panels_are_mirrored_by_padding():
    assert settings.P1_HUD_X == settings.HUD_PADDING
    assert settings.P2_HUD_X + settings.HEALTHBAR_WIDTH + settings.HUD_PADDING == settings.SCREEN_WIDTH
    assert settings.HUD_Y > settings.ARENA_HEIGHT


def test_main_configures_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    assert main.main(["--p1", "nobody"]) == 2
    assert calls and calls[0]["level"] == logging.INFO


def test_main_rejects_unknown_character(caplog):
    with caplog.at_level(logging.ERROR):
        assert main.main(["--p2", "wizard"]) == 2
    assert "wizard" in caplog.text
