"""
Page Framebuffer and Presenter
==============================

The emulated controller is written one page at a time: a page is an
8-pixel-tall strip spanning all 128 columns. The presenter keeps a single
page of pixels (one byte per pixel, palette index 0 = off, 1 = on),
copies it into an 8-bit palettized surface, converts that to the window
format and scale-blits it 2x into the page's band of the window.

Pixel layout of a column byte:
- bit 0 = top row of the page
- bit 7 = bottom row of the page

The window is presented only after page 7 is drawn, so a frame never
shows a mix of old and new pages.

Copyright (c) 2025 u8g2emu Contributors
"""

from typing import Iterator, List, Tuple
import contextlib
import io
import logging

import pygame
from PIL import Image

from u8g2emu.config import (
    BAND_HEIGHT,
    DISPLAY_WIDTH,
    PAGE_COUNT,
    PAGE_HEIGHT,
    WINDOW_WIDTH,
)
from u8g2emu.errors import PresentError, RasterizeError, SessionError
from u8g2emu.session import Session

logger = logging.getLogger(__name__)


class Presenter:
    """
    One-page pixel store plus composition into the window.

    Example:
        >>> presenter = Presenter(session)
        >>> presenter.write_column(0, 0x01)  # top-left pixel on
        >>> presenter.rasterize_and_blit(3)  # band y=48..63
        >>> presenter.present()
    """

    def __init__(self, session: Session):
        """
        Initialize presenter.

        Args:
            session: Display session whose window receives the pages
        """
        self._session = session
        self._pixels = bytearray(DISPLAY_WIDTH * PAGE_HEIGHT)
        self._frames_presented = 0

    @property
    def frames_presented(self) -> int:
        """Number of times the window has been flushed to screen."""
        return self._frames_presented

    # =========================================================================
    # Page Buffer
    # =========================================================================

    def write_column(self, column: int, bits: int) -> None:
        """
        Set the 8 pixels of one column from a column byte.

        Args:
            column: Column index (0-127)
            bits: Column byte, bit 0 = top row

        Raises:
            ValueError: Column outside the display
        """
        if not 0 <= column < DISPLAY_WIDTH:
            raise ValueError(f"Invalid column {column}")

        for row in range(PAGE_HEIGHT):
            self._pixels[row * DISPLAY_WIDTH + column] = (bits >> row) & 1

    def pixel(self, row: int, column: int) -> int:
        """
        Read one pixel of the page buffer.

        Returns:
            1 if on, 0 if off
        """
        if not (0 <= row < PAGE_HEIGHT and 0 <= column < DISPLAY_WIDTH):
            raise ValueError(f"Invalid position ({row}, {column})")
        return self._pixels[row * DISPLAY_WIDTH + column]

    def get_page_rows(self) -> List[bytes]:
        """Page buffer as 8 rows of 128 palette indices."""
        return [
            bytes(self._pixels[row * DISPLAY_WIDTH:(row + 1) * DISPLAY_WIDTH])
            for row in range(PAGE_HEIGHT)
        ]

    # =========================================================================
    # Composition
    # =========================================================================

    @contextlib.contextmanager
    def _locked(self, surface: pygame.Surface) -> Iterator[pygame.Surface]:
        surface.lock()
        try:
            yield surface
        finally:
            surface.unlock()

    def band_rect(self, page: int) -> Tuple[int, int, int, int]:
        """Window rectangle (x, y, w, h) that shows the given page."""
        return (0, page * BAND_HEIGHT, WINDOW_WIDTH, BAND_HEIGHT)

    def rasterize_and_blit(self, page: int) -> None:
        """
        Draw the page buffer into the window band of the given page.

        Args:
            page: Page index (0-7)

        Raises:
            ValueError: Page outside the display
            SessionError: Session is not open
            RasterizeError: Pixel copy, conversion or blit failed
        """
        if not 0 <= page < PAGE_COUNT:
            raise ValueError(f"Invalid page {page}")

        window = self._session.window
        surface = self._session.page_surface
        if window is None or surface is None:
            raise SessionError("display session is not open")

        try:
            with self._locked(surface):
                pixels = pygame.PixelArray(surface)
                try:
                    for row in range(PAGE_HEIGHT):
                        base = row * DISPLAY_WIDTH
                        for column in range(DISPLAY_WIDTH):
                            pixels[column, row] = self._pixels[base + column]
                finally:
                    pixels.close()
        except pygame.error as e:
            raise RasterizeError("could not write page surface", page, str(e)) from e

        try:
            converted = surface.convert(window)
        except pygame.error as e:
            raise RasterizeError("could not convert page", page, str(e)) from e

        x, y, w, h = self.band_rect(page)
        try:
            scaled = pygame.transform.scale(converted, (w, h))
            window.blit(scaled, (x, y))
        except pygame.error as e:
            raise RasterizeError("could not blit page", page, str(e)) from e

    def present(self) -> None:
        """
        Flush the window to screen.

        Raises:
            SessionError: Session is not open
            PresentError: The windowing library refused the flip
        """
        if not self._session.is_open:
            raise SessionError("display session is not open")
        try:
            pygame.display.flip()
        except pygame.error as e:
            raise PresentError("could not present window", str(e)) from e
        self._frames_presented += 1
        logger.debug("Presented frame %d", self._frames_presented)

    # =========================================================================
    # Snapshot Support
    # =========================================================================

    def snapshot_png(self) -> bytes:
        """
        Render the current window contents as a PNG image.

        Returns:
            PNG image bytes (256x128, RGB)
        """
        window = self._session.window
        if window is None:
            raise SessionError("display session is not open")

        raw = pygame.image.tobytes(window, "RGB")
        img = Image.frombytes("RGB", window.get_size(), raw)

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()
