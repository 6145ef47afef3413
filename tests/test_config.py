"""
Configuration Unit Tests
========================

Copyright (c) 2025 u8g2emu Contributors
"""

import logging
import os

from u8g2emu import EmulatorConfig


class TestDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        config = EmulatorConfig()
        assert config.window_title == "u8g2emu"
        assert config.video_driver is None
        assert config.log_level == "WARNING"
        assert config.max_diagnostics == 100


class TestFromEnv:
    """Test environment variable overrides."""

    def test_no_env(self, monkeypatch):
        for name in ("U8G2EMU_TITLE", "U8G2EMU_VIDEO_DRIVER",
                     "U8G2EMU_LOG_LEVEL", "U8G2EMU_MAX_DIAGNOSTICS"):
            monkeypatch.delenv(name, raising=False)
        assert EmulatorConfig.from_env() == EmulatorConfig()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("U8G2EMU_TITLE", "bench")
        monkeypatch.setenv("U8G2EMU_VIDEO_DRIVER", "dummy")
        monkeypatch.setenv("U8G2EMU_LOG_LEVEL", "debug")
        monkeypatch.setenv("U8G2EMU_MAX_DIAGNOSTICS", "10")

        config = EmulatorConfig.from_env()
        assert config.window_title == "bench"
        assert config.video_driver == "dummy"
        assert config.log_level == "DEBUG"
        assert config.max_diagnostics == 10

    def test_invalid_values_ignored(self, monkeypatch):
        monkeypatch.setenv("U8G2EMU_LOG_LEVEL", "loud")
        monkeypatch.setenv("U8G2EMU_MAX_DIAGNOSTICS", "many")
        config = EmulatorConfig.from_env()
        assert config.log_level == "WARNING"
        assert config.max_diagnostics == 100

    def test_non_positive_diagnostics_ignored(self, monkeypatch):
        monkeypatch.setenv("U8G2EMU_MAX_DIAGNOSTICS", "0")
        assert EmulatorConfig.from_env().max_diagnostics == 100


class TestApply:
    """Test applying configuration to the process."""

    def test_apply_video_driver(self, monkeypatch):
        monkeypatch.setenv("SDL_VIDEODRIVER", "x11")
        EmulatorConfig(video_driver="dummy").apply_video_driver()
        assert os.environ["SDL_VIDEODRIVER"] == "dummy"

    def test_no_driver_leaves_env(self, monkeypatch):
        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
        EmulatorConfig().apply_video_driver()
        assert os.environ["SDL_VIDEODRIVER"] == "dummy"

    def test_apply_log_level(self):
        logger = logging.getLogger("u8g2emu")
        previous = logger.level
        try:
            EmulatorConfig(log_level="ERROR").apply_log_level()
            assert logger.level == logging.ERROR
        finally:
            logger.setLevel(previous)
