"""
u8g2emu - Page-Addressed Display Emulator
=========================================

Runs firmware written against the u8g2/u8x8 byte display protocol on a
desktop, drawing the 128x64 monochrome display 2x magnified in a
256x128 pygame window and turning arrow/Enter/Escape keys into menu
navigation signals.

Main Components
---------------
- **session**: the single display session (window, page surface, state)
- **protocol**: byte protocol translator (data/command, page addressing)
- **framebuffer**: one-page pixel buffer, scaled blit and present
- **keyboard**: host key to menu signal mapping
- **diagnostics**: structured sink for advisory failures

Quick Start
-----------
    >>> from u8g2emu import Session, Translator, InputMapper, MenuEvent
    >>> with Session() as session:
    ...     display = Translator(session)
    ...     display.command(0xB0)
    ...     display.data([0xFF] * 128)
    ...     menu = InputMapper(session)
    ...     event = menu.next_menu_event()

Or use the command-line tool:
    $ u8g2emu demo
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from u8g2emu.config import EmulatorConfig
from u8g2emu.diagnostics import DiagnosticEntry, Diagnostics
from u8g2emu.errors import (
    U8g2EmuError,
    SessionError,
    HostGraphicsError,
    DisplayInitError,
    RasterizeError,
    PresentError,
)
from u8g2emu.session import Session, SessionState
from u8g2emu.framebuffer import Presenter
from u8g2emu.protocol import MessageKind, Translator
from u8g2emu.keyboard import InputMapper, MenuEvent, map_event

__all__ = [
    "__version__",
    # Configuration
    "EmulatorConfig",
    # Diagnostics
    "DiagnosticEntry",
    "Diagnostics",
    # Errors
    "U8g2EmuError",
    "SessionError",
    "HostGraphicsError",
    "DisplayInitError",
    "RasterizeError",
    "PresentError",
    # Display
    "Session",
    "SessionState",
    "Presenter",
    "MessageKind",
    "Translator",
    # Input
    "InputMapper",
    "MenuEvent",
    "map_event",
]
