"""
u8g2emu - Test Configuration
============================

pytest fixtures shared by all tests. pygame runs with the SDL dummy
video driver so the window exists without a display server.

Copyright (c) 2025 u8g2emu Contributors
"""

import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from u8g2emu import EmulatorConfig, Session, Translator


@pytest.fixture(autouse=True)
def release_live_session():
    """Fixture: close any session a test left open."""
    yield
    live = Session.live()
    if live is not None:
        live.close()


@pytest.fixture
def config() -> EmulatorConfig:
    """Fixture: headless emulator configuration."""
    return EmulatorConfig(video_driver="dummy")


@pytest.fixture
def session(config):
    """Fixture: open session with an empty event queue."""
    with Session(config) as s:
        pygame.event.clear()
        yield s


@pytest.fixture
def translator(session) -> Translator:
    """Fixture: translator bound to the open session."""
    return Translator(session)


@pytest.fixture
def pixel_on(session):
    """Fixture: check whether a logical pixel (row 0-63, column 0-127) is white."""
    def check(row: int, column: int) -> bool:
        color = session.window.get_at((column * 2, row * 2))
        return (color.r, color.g, color.b) == (255, 255, 255)
    return check
