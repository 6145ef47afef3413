"""
Menu Input Mapper
=================

Maps host key presses to the six menu navigation signals that u8g2
menu code polls for:

    Key          Signal
    ---------    ------
    Up arrow     UP
    Down arrow   DOWN
    Left arrow   PREV
    Right arrow  NEXT
    Enter        SELECT
    Escape       HOME

Every other event (key releases, unmapped keys, mouse and window events)
maps to NONE. Each query consumes exactly one host event.

Copyright (c) 2025 u8g2emu Contributors
"""

from enum import IntEnum
from typing import Dict, Optional
import logging

import pygame

from u8g2emu.session import Session

logger = logging.getLogger(__name__)


class MenuEvent(IntEnum):
    """Menu signals, numbered as u8x8 GPIO menu messages."""
    NONE = 0
    SELECT = 80
    NEXT = 81
    PREV = 82
    HOME = 83
    UP = 84
    DOWN = 85


# =============================================================================
# KEY TO SIGNAL MAPPING
# =============================================================================

KEY_TO_MENU_EVENT: Dict[int, MenuEvent] = {
    pygame.K_UP: MenuEvent.UP,
    pygame.K_DOWN: MenuEvent.DOWN,
    pygame.K_LEFT: MenuEvent.PREV,
    pygame.K_RIGHT: MenuEvent.NEXT,
    pygame.K_RETURN: MenuEvent.SELECT,
    pygame.K_ESCAPE: MenuEvent.HOME,
}


def map_event(event: pygame.event.Event) -> MenuEvent:
    """
    Translate one host event into a menu signal.

    Args:
        event: pygame event

    Returns:
        The mapped signal, or MenuEvent.NONE
    """
    if event.type != pygame.KEYDOWN:
        return MenuEvent.NONE
    return KEY_TO_MENU_EVENT.get(event.key, MenuEvent.NONE)


class InputMapper:
    """
    Blocking menu event source backed by the host event queue.

    A window close request is reported as NONE and sets quit_requested,
    so a menu loop can stop without a dedicated key.

    Example:
        >>> mapper = InputMapper(session)
        >>> while not mapper.quit_requested:
        ...     event = mapper.next_menu_event()
        ...     if event == MenuEvent.HOME:
        ...         break
    """

    def __init__(self, session: Session):
        """
        Initialize input mapper.

        Args:
            session: Display session owning the window that receives input
        """
        self._session = session
        self.quit_requested = False

    def next_menu_event(self, timeout_ms: Optional[int] = None) -> MenuEvent:
        """
        Wait for one host event and map it.

        Args:
            timeout_ms: Give up after this many milliseconds and return
                NONE. None waits forever.

        Returns:
            One of the seven MenuEvent values

        Raises:
            SessionError: The session was closed
            DisplayInitError: The session was not open and opening failed
        """
        self._session.open()

        if timeout_ms is None:
            event = pygame.event.wait()
        else:
            event = pygame.event.wait(timeout_ms)

        if event.type == pygame.QUIT:
            logger.debug("Window close requested")
            self.quit_requested = True
            return MenuEvent.NONE

        return map_event(event)

    def pump_host_events(self) -> None:
        """Let the window system process pending messages."""
        if not self._session.is_open:
            return
        pygame.event.pump()
