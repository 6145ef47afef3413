"""
Display Session Unit Tests
==========================

Tests for session lifecycle, single-instance rule and protocol state.

Copyright (c) 2025 u8g2emu Contributors
"""

import pygame
import pytest

from u8g2emu import DisplayInitError, EmulatorConfig, Session, SessionError


# =============================================================================
# Lifecycle Tests
# =============================================================================

class TestLifecycle:
    """Test open/close and the context manager."""

    def test_new_session_not_open(self, config):
        session = Session(config)
        assert session.is_open is False
        assert session.window is None
        assert session.page_surface is None

    def test_context_manager(self, config):
        """with-block opens on entry and closes on exit."""
        with Session(config) as session:
            assert session.is_open
            assert Session.live() is session
        assert not session.is_open
        assert Session.live() is None

    def test_closes_on_exception(self, config):
        """Resources are released when the block raises."""
        with pytest.raises(RuntimeError):
            with Session(config) as session:
                raise RuntimeError("firmware crashed")
        assert not session.is_open
        assert Session.live() is None

    def test_window_size(self, session):
        assert session.window.get_size() == (256, 128)

    def test_window_title(self):
        with Session(EmulatorConfig(window_title="menu test", video_driver="dummy")):
            assert pygame.display.get_caption()[0] == "menu test"

    def test_page_surface(self, session):
        """Page surface is 128x8, 8 bits per pixel, black/white palette."""
        surface = session.page_surface
        assert surface.get_size() == (128, 8)
        assert surface.get_bitsize() == 8
        palette = surface.get_palette()
        assert tuple(palette[0])[:3] == (0, 0, 0)
        assert tuple(palette[1])[:3] == (255, 255, 255)

    def test_palette(self, session):
        assert session.palette == ((0, 0, 0), (255, 255, 255))

    def test_open_twice_is_noop(self, session):
        window = session.window
        assert session.open() is session
        assert session.window is window

    def test_close_twice(self, config):
        session = Session(config).open()
        session.close()
        session.close()
        assert not session.is_open

    def test_reopen_after_close_fails(self, config):
        session = Session(config).open()
        session.close()
        with pytest.raises(SessionError):
            session.open()

    def test_single_live_session(self, session, config):
        """A second session cannot open while one is live."""
        with pytest.raises(SessionError):
            Session(config).open()

    def test_new_session_after_close(self, config):
        Session(config).open().close()
        with Session(config) as second:
            assert second.is_open

    def test_open_failure(self, config, monkeypatch):
        """Window creation errors become DisplayInitError."""
        def fail(*args, **kwargs):
            raise pygame.error("no available video device")

        monkeypatch.setattr(pygame.display, "set_mode", fail)
        session = Session(config)
        with pytest.raises(DisplayInitError) as exc_info:
            session.open()
        assert "no available video device" in str(exc_info.value)
        assert not session.is_open
        assert Session.live() is None


# =============================================================================
# Protocol State Tests
# =============================================================================

class TestState:
    """Test page and mode state."""

    def test_initial_state(self, config):
        session = Session(config)
        assert session.current_page == 0
        assert session.data_mode is False

    @pytest.mark.parametrize("value,expected", [(-3, 0), (0, 0), (7, 7), (12, 7)])
    def test_page_clamped(self, config, value, expected):
        session = Session(config)
        session.current_page = value
        assert session.current_page == expected

    def test_repr(self, config):
        session = Session(config)
        assert "new" in repr(session)
        assert "page=0" in repr(session)
