"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the CLI.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from u8g2emu.errors import DisplayInitError, U8g2EmuError


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    DISPLAY_ERROR = 1    # Window could not be opened or drawn
    INVALID_ARGS = 2     # Invalid arguments or unwritable output
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, DisplayInitError):
        click.echo(f"Display error: {error}", err=True)
        click.echo("hint: set U8G2EMU_VIDEO_DRIVER=dummy for headless runs", err=True)
        sys.exit(ExitCode.DISPLAY_ERROR)

    elif isinstance(error, U8g2EmuError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DISPLAY_ERROR)

    elif isinstance(error, (click.BadParameter, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
