"""
u8g2emu - Configuration
=======================

Emulator configuration: window title, host video driver, logging level
and diagnostics retention. Configuration can come from:
- Default values (defined here)
- Environment variables

The logical display geometry is not configurable. The protocol always
addresses 128x64 pixels in eight pages, shown 2x magnified.

Copyright (c) 2025 u8g2emu Contributors
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os


# ═══════════════════════════════════════════════════════════════════════════════
# DISPLAY GEOMETRY
# ═══════════════════════════════════════════════════════════════════════════════

DISPLAY_WIDTH = 128  # logical columns
DISPLAY_HEIGHT = 64  # logical rows
PAGE_HEIGHT = 8  # rows per page
PAGE_COUNT = DISPLAY_HEIGHT // PAGE_HEIGHT
LAST_PAGE = PAGE_COUNT - 1

SCALE = 2
WINDOW_WIDTH = DISPLAY_WIDTH * SCALE
WINDOW_HEIGHT = DISPLAY_HEIGHT * SCALE
BAND_HEIGHT = PAGE_HEIGHT * SCALE

# Palette index 0 = off, 1 = on
PALETTE = ((0, 0, 0), (255, 255, 255))

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EmulatorConfig:
    """
    Configuration for a display session.

    Attributes:
        window_title: Caption of the emulator window (default: "u8g2emu")
        video_driver: SDL video driver to force, e.g. "dummy" for headless
            runs (default: None, let SDL choose)
        log_level: Level name for the u8g2emu loggers (default: "WARNING")
        max_diagnostics: Maximum diagnostic entries kept (default: 100)
    """

    window_title: str = "u8g2emu"
    video_driver: Optional[str] = None
    log_level: str = "WARNING"
    max_diagnostics: int = 100

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "EmulatorConfig":
        """
        Create EmulatorConfig from environment variables.

        Environment variables (all optional):
            U8G2EMU_TITLE: Window caption
            U8G2EMU_VIDEO_DRIVER: SDL video driver name
            U8G2EMU_LOG_LEVEL: Logging level name
            U8G2EMU_MAX_DIAGNOSTICS: Diagnostics retention (integer > 0)

        Returns:
            EmulatorConfig with values from environment variables
        """
        config = cls()

        if title := os.environ.get("U8G2EMU_TITLE"):
            config.window_title = title

        if driver := os.environ.get("U8G2EMU_VIDEO_DRIVER"):
            config.video_driver = driver

        if level := os.environ.get("U8G2EMU_LOG_LEVEL"):
            if level.upper() in VALID_LOG_LEVELS:
                config.log_level = level.upper()

        if max_diag := os.environ.get("U8G2EMU_MAX_DIAGNOSTICS"):
            try:
                value = int(max_diag)
            except ValueError:
                value = 0
            if value > 0:
                config.max_diagnostics = value

        return config

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def apply_video_driver(self) -> None:
        """Export the configured video driver for SDL, if any."""
        if self.video_driver:
            os.environ["SDL_VIDEODRIVER"] = self.video_driver

    def apply_log_level(self) -> None:
        """Set the level of the package logger."""
        logging.getLogger("u8g2emu").setLevel(self.log_level)
