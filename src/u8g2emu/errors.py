"""
u8g2emu Error Hierarchy
=======================

This module defines the exception hierarchy for the display emulator.
All exceptions inherit from U8g2EmuError, allowing callers to catch all
emulator-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
U8g2EmuError (base)
├── SessionError - session lifecycle misuse (second live session, use after close)
└── HostGraphicsError - failure reported by the windowing library
    ├── DisplayInitError - window, surface or palette could not be created
    ├── RasterizeError - page copy, conversion or scaled blit failed
    └── PresentError - flushing the window to screen failed

None of these reach firmware-facing callers through the protocol
translator: it turns every one of them into a diagnostic, so the byte
stream is never aborted. Direct users of Session, Presenter and
InputMapper see them raised.

Copyright (c) 2025 u8g2emu Contributors
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class U8g2EmuError(Exception):
    """
    Base exception for all u8g2emu errors.

        try:
            session.open()
        except U8g2EmuError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Session Exceptions
# =============================================================================

class SessionError(U8g2EmuError):
    """
    Display session used outside its lifecycle.

    Raised when:
    - A second session is opened while another one is still live
    - A closed session is asked to draw
    """
    pass


# =============================================================================
# Host Graphics Exceptions
# =============================================================================

class HostGraphicsError(U8g2EmuError):
    """
    Base exception for failures reported by the windowing library.

    Attributes:
        message: The error description
        host_error: The text of the underlying pygame error (optional)
    """

    def __init__(self, message: str, host_error: Optional[str] = None):
        self.message = message
        self.host_error = host_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.host_error:
            return f"{self.message}: {self.host_error}"
        return self.message


class DisplayInitError(HostGraphicsError):
    """
    Window, page surface or palette creation failed.

    The translator records this and retries opening the session on the
    next protocol message.
    """
    pass


class RasterizeError(HostGraphicsError):
    """
    Converting or blitting a page into the window failed.

    Attributes:
        page: Page index whose update was skipped
    """

    def __init__(self, message: str, page: int, host_error: Optional[str] = None):
        self.page = page
        super().__init__(message, host_error=host_error)


class PresentError(HostGraphicsError):
    """
    Flushing the window to screen failed.

    The frame stays in the window surface and is shown by the next
    successful present.
    """
    pass
