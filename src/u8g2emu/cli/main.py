"""
u8g2emu - Display Emulator Command-Line Interface
=================================================

This module implements the `u8g2emu` command-line tool. It exercises the
emulator the way firmware does: every pixel reaches the window through
the byte protocol translator.

Usage Examples
--------------
Show the demo pattern and navigate it with the arrow keys:
    $ u8g2emu demo

Save a screenshot without entering the menu loop (headless):
    $ U8G2EMU_VIDEO_DRIVER=dummy u8g2emu demo --no-menu --screenshot demo.png

Cycle the highlight through all eight items, then exit:
    $ U8G2EMU_VIDEO_DRIVER=dummy u8g2emu demo --no-menu --frames 8

Show the key table:
    $ u8g2emu keys

Menu Demo
---------
Each page band is one menu item. Up/Down move the highlighted item,
Enter reports it, Escape (HOME) or closing the window exits.

Exit Codes
----------
0 - Success
1 - Display could not be opened
2 - Invalid arguments or unwritable output
3 - Internal error
"""

import logging
from pathlib import Path
from typing import List, Optional

import click
import pygame

from u8g2emu import __version__
from u8g2emu.cli.errors import handle_cli_exception
from u8g2emu.config import DISPLAY_WIDTH, PAGE_COUNT, EmulatorConfig
from u8g2emu.keyboard import KEY_TO_MENU_EVENT, InputMapper, MenuEvent
from u8g2emu.protocol import SET_PAGE_FIRST, Translator
from u8g2emu.session import Session

logger = logging.getLogger(__name__)


# SSD1306 128x64 power-up sequence; only page addressing is modelled,
# the rest exercises the ignore path
SSD1306_INIT = bytes([
    0xAE, 0xD5, 0x80, 0xA8, 0x3F, 0xD3, 0x00, 0x40, 0x8D, 0x14,
    0x20, 0x00, 0xA1, 0xC8, 0xDA, 0x12, 0x81, 0xCF, 0xD9, 0xF1,
    0xDB, 0x40, 0x2E, 0xA4, 0xA6, 0xAF,
])

KEY_LABELS = {
    pygame.K_UP: "Up",
    pygame.K_DOWN: "Down",
    pygame.K_LEFT: "Left",
    pygame.K_RIGHT: "Right",
    pygame.K_RETURN: "Enter",
    pygame.K_ESCAPE: "Escape",
}


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores verbosity and the emulator configuration.
    """

    def __init__(self) -> None:
        self.verbose: bool = False
        self.config: EmulatorConfig = EmulatorConfig()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )
        if self.verbose:
            self.config.log_level = "DEBUG"
        self.config.apply_log_level()


pass_context = click.make_pass_decorator(Context, ensure=True)


def page_pattern(page: int, selected: bool = False) -> List[int]:
    """
    Column bytes for one demo menu item.

    The item is a framed bar whose length grows with the page number.
    The selected item is drawn inverted.

    Args:
        page: Page index (0-7)
        selected: Draw highlighted

    Returns:
        128 column bytes
    """
    bar_end = 4 + (page + 1) * (DISPLAY_WIDTH - 8) // PAGE_COUNT
    columns = []
    for column in range(DISPLAY_WIDTH):
        bits = 0
        if column in (0, DISPLAY_WIDTH - 1):
            bits = 0xFF
        elif 4 <= column < bar_end:
            bits = 0x3C
        if page == 0:
            bits |= 0x01
        if page == PAGE_COUNT - 1:
            bits |= 0x80
        if selected:
            bits ^= 0xFF
        columns.append(bits)
    return columns


def draw_menu(display: Translator, selected: int) -> None:
    """Send all eight pages, highlighting the selected one."""
    for page in range(PAGE_COUNT):
        display.command(SET_PAGE_FIRST + page, 0x00, 0x10)
        display.data(page_pattern(page, selected=(page == selected)))


def run_menu(display: Translator, menu: InputMapper, selected: int = 0) -> Optional[int]:
    """
    Menu loop: move the highlight until HOME or window close.

    Args:
        display: Translator the menu is drawn through
        menu: Source of menu signals
        selected: Item highlighted when the loop starts

    Returns:
        The last item chosen with SELECT, or None
    """
    chosen = None
    while not menu.quit_requested:
        event = menu.next_menu_event()
        if event == MenuEvent.NONE:
            continue
        click.echo(f"{event.name}")
        if event == MenuEvent.HOME:
            break
        if event in (MenuEvent.UP, MenuEvent.PREV):
            selected = (selected - 1) % PAGE_COUNT
        elif event in (MenuEvent.DOWN, MenuEvent.NEXT):
            selected = (selected + 1) % PAGE_COUNT
        elif event == MenuEvent.SELECT:
            chosen = selected
            click.echo(f"Selected item {selected}")
        draw_menu(display, selected)
    return chosen


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="u8g2emu")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Emulate a 128x64 page-addressed monochrome display in a window.

    Configuration comes from U8G2EMU_* environment variables
    (U8G2EMU_TITLE, U8G2EMU_VIDEO_DRIVER, U8G2EMU_LOG_LEVEL,
    U8G2EMU_MAX_DIAGNOSTICS).
    """
    ctx.verbose = verbose
    ctx.config = EmulatorConfig.from_env()
    ctx.setup_logging()


# =============================================================================
# Demo Command
# =============================================================================

@main.command()
@click.option(
    "--screenshot", "-s",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a PNG of the window after the last drawn frame",
)
@click.option(
    "--frames", "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Frames to draw before the menu starts; the highlight moves one item per frame",
)
@click.option(
    "--no-menu",
    is_flag=True,
    help="Exit after drawing instead of running the menu loop",
)
@pass_context
def demo(
    ctx: Context,
    screenshot: Optional[Path],
    frames: int,
    no_menu: bool,
) -> None:
    """
    Draw the demo menu through the byte protocol.

    Example:
        u8g2emu demo
        u8g2emu demo --no-menu --screenshot demo.png
        u8g2emu demo --no-menu --frames 8
    """
    try:
        with Session(ctx.config) as session:
            display = Translator(session)
            display.command(*SSD1306_INIT)
            for frame in range(frames):
                draw_menu(display, selected=frame % PAGE_COUNT)
            selected = (frames - 1) % PAGE_COUNT

            if screenshot is not None:
                screenshot.write_bytes(display.presenter.snapshot_png())
                click.echo(f"Wrote {screenshot}")

            if no_menu:
                click.echo(f"Drew {display.presenter.frames_presented} frame(s)")
            else:
                run_menu(display, InputMapper(session), selected)

            if session.diagnostics or ctx.verbose:
                click.echo(session.diagnostics.format_report(), err=True)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


# =============================================================================
# Keys Command
# =============================================================================

@main.command()
def keys() -> None:
    """
    Show which host keys produce which menu signals.

    Example:
        u8g2emu keys
    """
    for key, event in KEY_TO_MENU_EVENT.items():
        click.echo(f"{KEY_LABELS[key]:<12} {event.name}")


if __name__ == "__main__":
    main()
