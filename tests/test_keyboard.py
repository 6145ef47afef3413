"""
Menu Input Unit Tests
=====================

Tests for mapping host key events to menu signals.

Copyright (c) 2025 u8g2emu Contributors
"""

import pygame
import pytest

from u8g2emu import InputMapper, MenuEvent, Session, SessionError, map_event


@pytest.fixture
def mapper(session) -> InputMapper:
    return InputMapper(session)


def key_event(key: int, down: bool = True) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN if down else pygame.KEYUP, key=key)


# =============================================================================
# Event Mapping Tests
# =============================================================================

class TestMapEvent:
    """Test translation of single events."""

    @pytest.mark.parametrize("key,expected", [
        (pygame.K_UP, MenuEvent.UP),
        (pygame.K_DOWN, MenuEvent.DOWN),
        (pygame.K_LEFT, MenuEvent.PREV),
        (pygame.K_RIGHT, MenuEvent.NEXT),
        (pygame.K_RETURN, MenuEvent.SELECT),
        (pygame.K_ESCAPE, MenuEvent.HOME),
    ])
    def test_mapped_keys(self, key, expected):
        assert map_event(key_event(key)) == expected

    def test_key_release_is_none(self):
        """Releasing a mapped key gives no signal."""
        assert map_event(key_event(pygame.K_UP, down=False)) == MenuEvent.NONE

    def test_unmapped_key_is_none(self):
        assert map_event(key_event(pygame.K_a)) == MenuEvent.NONE

    def test_non_keyboard_event_is_none(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
        assert map_event(event) == MenuEvent.NONE

    def test_u8x8_numbering(self):
        """Signal values follow the u8x8 GPIO menu messages."""
        assert MenuEvent.NONE == 0
        assert MenuEvent.SELECT == 80
        assert MenuEvent.DOWN == 85


# =============================================================================
# Blocking Query Tests
# =============================================================================

class TestNextMenuEvent:
    """Test the blocking event query."""

    def test_posted_key(self, mapper):
        pygame.event.post(key_event(pygame.K_RETURN))
        assert mapper.next_menu_event() == MenuEvent.SELECT

    def test_consumes_one_event(self, mapper):
        """Each call consumes exactly one host event."""
        pygame.event.post(key_event(pygame.K_UP))
        pygame.event.post(key_event(pygame.K_DOWN))

        assert mapper.next_menu_event() == MenuEvent.UP
        assert mapper.next_menu_event() == MenuEvent.DOWN

    def test_unrecognized_then_key(self, mapper):
        """An unmapped event yields NONE and does not skip the next one."""
        pygame.event.post(key_event(pygame.K_b))
        pygame.event.post(key_event(pygame.K_ESCAPE))

        assert mapper.next_menu_event() == MenuEvent.NONE
        assert mapper.next_menu_event() == MenuEvent.HOME

    def test_timeout_returns_none(self, mapper):
        """With a timeout and no input the wait ends with NONE."""
        pygame.event.clear()
        assert mapper.next_menu_event(timeout_ms=10) == MenuEvent.NONE

    def test_quit_sets_flag(self, mapper):
        """Window close yields NONE and requests quit."""
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert mapper.next_menu_event() == MenuEvent.NONE
        assert mapper.quit_requested is True

    def test_closed_session(self, config):
        """Querying a closed session is an error."""
        session = Session(config).open()
        session.close()
        with pytest.raises(SessionError):
            InputMapper(session).next_menu_event(timeout_ms=1)


# =============================================================================
# Event Pump Tests
# =============================================================================

class TestPump:
    """Test the event pump."""

    def test_pump_keeps_events(self, mapper):
        """Pumping does not consume queued input."""
        pygame.event.post(key_event(pygame.K_LEFT))
        mapper.pump_host_events()
        assert mapper.next_menu_event() == MenuEvent.PREV

    def test_pump_without_window(self, config):
        """Pumping before the session is open does nothing."""
        InputMapper(Session(config)).pump_host_events()
