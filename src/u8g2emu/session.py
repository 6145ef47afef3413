"""
Display Session
===============

The session owns everything the emulator shares between protocol
messages: the addressed page, the data/command flag, the host window
and the reusable one-page surface with its two-colour palette.

Exactly one session may be live per process. The host application
normally opens it explicitly::

    >>> with Session() as session:
    ...     translator = Translator(session)
    ...     translator.handle_message(MessageKind.BYTE_SET_DC, 0)

If the firmware starts talking before the host opened the session, the
translator opens it lazily on the first message.

Copyright (c) 2025 u8g2emu Contributors
"""

from dataclasses import dataclass
from typing import ClassVar, Optional
import logging

import pygame

from u8g2emu.config import (
    DISPLAY_WIDTH,
    PAGE_COUNT,
    PAGE_HEIGHT,
    PALETTE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    EmulatorConfig,
)
from u8g2emu.diagnostics import Diagnostics
from u8g2emu.errors import DisplayInitError, SessionError

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """
    Protocol state carried between messages.

    Attributes:
        current_page: Page addressed by data writes (0-7)
        data_mode: True = bytes are pixel data, False = bytes are commands
    """
    current_page: int = 0
    data_mode: bool = False


class Session:
    """
    Explicit handle for the single emulated display.

    Attributes:
        config: Emulator configuration
        diagnostics: Sink for advisory failures
    """

    _live: ClassVar[Optional["Session"]] = None

    def __init__(self, config: Optional[EmulatorConfig] = None):
        self.config = config or EmulatorConfig()
        self.diagnostics = Diagnostics(self.config.max_diagnostics)
        self._state = SessionState()
        self._window: Optional[pygame.Surface] = None
        self._page_surface: Optional[pygame.Surface] = None
        self._closed = False

    # =========================================================================
    # Protocol State
    # =========================================================================

    @property
    def current_page(self) -> int:
        """Page addressed by data writes."""
        return self._state.current_page

    @current_page.setter
    def current_page(self, page: int) -> None:
        self._state.current_page = min(max(page, 0), PAGE_COUNT - 1)

    @property
    def data_mode(self) -> bool:
        """True when sent bytes are pixel data."""
        return self._state.data_mode

    @data_mode.setter
    def data_mode(self, enabled: bool) -> None:
        self._state.data_mode = bool(enabled)

    # =========================================================================
    # Host Resources
    # =========================================================================

    @property
    def is_open(self) -> bool:
        """True while the window and page surface exist."""
        return self._window is not None

    @property
    def window(self) -> Optional[pygame.Surface]:
        """The window surface, or None when not open."""
        return self._window

    @property
    def page_surface(self) -> Optional[pygame.Surface]:
        """The 8-bit one-page surface, or None when not open."""
        return self._page_surface

    @property
    def palette(self) -> tuple:
        """Two-entry palette: index 0 = off, index 1 = on."""
        return PALETTE

    @classmethod
    def live(cls) -> Optional["Session"]:
        """The currently open session of this process, if any."""
        return cls._live

    def open(self) -> "Session":
        """
        Create the window, the page surface and its palette.

        Opening an already open session does nothing.

        Returns:
            self, for chaining

        Raises:
            SessionError: Another session is live, or this one was closed
            DisplayInitError: The windowing library refused a resource
        """
        if self.is_open:
            return self
        if self._closed:
            raise SessionError("session has been closed")
        if Session._live is not None and Session._live is not self:
            raise SessionError("another display session is already open")

        self.config.apply_video_driver()
        try:
            pygame.display.init()
            window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(self.config.window_title)
        except pygame.error as e:
            pygame.display.quit()
            raise DisplayInitError("could not create window", str(e)) from e

        try:
            page_surface = pygame.Surface((DISPLAY_WIDTH, PAGE_HEIGHT), 0, 8)
            page_surface.set_palette(PALETTE)
        except pygame.error as e:
            pygame.display.quit()
            raise DisplayInitError("could not create page surface", str(e)) from e

        self._window = window
        self._page_surface = page_surface
        Session._live = self
        logger.debug("Opened %dx%d window", WINDOW_WIDTH, WINDOW_HEIGHT)
        return self

    def close(self) -> None:
        """
        Release the page surface and the window.

        Safe to call more than once; resources are released only once.
        """
        if self._closed:
            return
        self._closed = True

        if self.is_open:
            self._page_surface = None
            self._window = None
            pygame.display.quit()
            logger.debug("Closed display session")

        if Session._live is self:
            Session._live = None

    def __enter__(self) -> "Session":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "open" if self.is_open else ("closed" if self._closed else "new")
        return (
            f"Session({status}, page={self.current_page}, "
            f"data_mode={self.data_mode})"
        )
