"""
u8g2emu Command-Line Interface
==============================

This package provides the `u8g2emu` command:

- **demo**: drive a test pattern through the protocol and run a menu loop
- **keys**: show the key to menu signal table

The tool is implemented as a Click-based CLI application.
"""

__all__ = ["main"]
