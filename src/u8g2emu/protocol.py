"""
Byte Protocol Translator
========================

Interprets the byte-level display protocol spoken by u8x8 display
drivers and renders it through the presenter.

The driver multiplexes commands and pixel data over one byte channel.
A data/command signal (BYTE_SET_DC) selects how following bytes are read:

- Command mode: bytes are controller commands. Only "set page address"
  (0xB0-0xB7, low 3 bits = page) is modelled; all other commands are
  accepted and ignored.
- Data mode: a BYTE_SEND carries one page worth of column bytes. Byte i
  holds the 8 pixels of column i, bit 0 at the top.

A typical page update from the driver looks like::

    SET_DC 0, START_TRANSFER, SEND [0xB3, 0x00, 0x10], END_TRANSFER
    SET_DC 1, START_TRANSFER, SEND [128 column bytes], END_TRANSFER

Copyright (c) 2025 u8g2emu Contributors
"""

from enum import IntEnum
from typing import Optional, Sequence, Union
import logging

from u8g2emu import diagnostics
from u8g2emu.config import DISPLAY_WIDTH, LAST_PAGE
from u8g2emu.errors import DisplayInitError, PresentError, RasterizeError, SessionError
from u8g2emu.framebuffer import Presenter
from u8g2emu.session import Session

logger = logging.getLogger(__name__)


class MessageKind(IntEnum):
    """Byte-level messages of the u8x8 driver interface."""
    BYTE_INIT = 20
    BYTE_SEND = 23
    BYTE_START_TRANSFER = 24
    BYTE_END_TRANSFER = 25
    BYTE_SET_DC = 32


# Set page address command range
SET_PAGE_FIRST = 0xB0
SET_PAGE_LAST = 0xB7

ACK = 1


class Translator:
    """
    Protocol state machine for one display session.

    Example:
        >>> translator = Translator(session)
        >>> translator.command(0xB3)            # address page 3
        >>> translator.data(bytes([0x01]) + bytes(127))
        >>> session.current_page
        3
    """

    def __init__(self, session: Session, presenter: Optional[Presenter] = None):
        """
        Initialize translator.

        Args:
            session: Display session holding page and mode state
            presenter: Presenter to draw through (created if omitted)
        """
        self._session = session
        self._presenter = presenter or Presenter(session)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def presenter(self) -> Presenter:
        return self._presenter

    # =========================================================================
    # Driver Callbacks
    # =========================================================================

    def handle_message(
        self,
        kind: Union[MessageKind, int],
        arg: int = 0,
        payload: Optional[Sequence[int]] = None,
    ) -> int:
        """
        Process one byte-interface message.

        Args:
            kind: Message kind
            arg: Byte count for BYTE_SEND, 0/1 for BYTE_SET_DC
            payload: Bytes for BYTE_SEND

        Returns:
            1 (acknowledge); failures only go to diagnostics
        """
        self._ensure_open()

        if kind == MessageKind.BYTE_SEND:
            data = bytes(payload or b"")[:arg]
            if self._session.data_mode:
                self._write_page(data)
            else:
                self._run_commands(data)

        elif kind == MessageKind.BYTE_SET_DC:
            self._session.data_mode = bool(arg)

        # BYTE_INIT, START/END_TRANSFER and unknown kinds need no action

        return ACK

    def gpio_and_delay(
        self,
        kind: int,
        arg: int = 0,
        payload: Optional[Sequence[int]] = None,
    ) -> int:
        """GPIO and delay callback. Pins and timing are not emulated."""
        return ACK

    __call__ = handle_message

    # =========================================================================
    # Driver-Style Helpers
    # =========================================================================

    def command(self, *codes: int) -> None:
        """Send command bytes the way a u8x8 driver does."""
        self._transfer(False, bytes(codes))

    def data(self, payload: Sequence[int]) -> None:
        """Send one page of column bytes the way a u8x8 driver does."""
        self._transfer(True, bytes(payload))

    def _transfer(self, data_mode: bool, payload: bytes) -> None:
        self.handle_message(MessageKind.BYTE_SET_DC, int(data_mode))
        self.handle_message(MessageKind.BYTE_START_TRANSFER)
        self.handle_message(MessageKind.BYTE_SEND, len(payload), payload)
        self.handle_message(MessageKind.BYTE_END_TRANSFER)

    # =========================================================================
    # Message Handling
    # =========================================================================

    def _ensure_open(self) -> None:
        if self._session.is_open:
            return
        try:
            self._session.open()
        except DisplayInitError as e:
            logger.error("Display init failed: %s", e)
            self._session.diagnostics.record(diagnostics.INIT, str(e))
        except SessionError as e:
            logger.warning("Drawing skipped: %s", e)
            self._session.diagnostics.record(diagnostics.SESSION, str(e))

    def _run_commands(self, data: bytes) -> None:
        for code in data:
            if SET_PAGE_FIRST <= code <= SET_PAGE_LAST:
                self._session.current_page = code - SET_PAGE_FIRST
                logger.debug("Page address set to %d", self._session.current_page)

    def _write_page(self, data: bytes) -> None:
        for column in range(DISPLAY_WIDTH):
            bits = data[column] if column < len(data) else 0
            self._presenter.write_column(column, bits)

        if not self._session.is_open:
            return

        page = self._session.current_page
        try:
            self._presenter.rasterize_and_blit(page)
        except RasterizeError as e:
            logger.warning("Page %d not drawn: %s", page, e)
            self._session.diagnostics.record(diagnostics.RASTER, str(e), page=page)

        if page == LAST_PAGE:
            try:
                self._presenter.present()
            except PresentError as e:
                logger.warning("Frame not presented: %s", e)
                self._session.diagnostics.record(diagnostics.PRESENT, str(e), page=page)
