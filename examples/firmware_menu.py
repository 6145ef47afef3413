#!/usr/bin/env python3
"""
Firmware Menu Example
=====================

This script shows how firmware-style code drives the emulator through
the two u8x8 driver callbacks, exactly as a C driver would:

1. Open a display session
2. Send the controller init sequence in command mode
3. Stream eight pages of column bytes
4. Poll menu events until Escape

Usage:
    python examples/firmware_menu.py

Copyright (c) 2025 u8g2emu Contributors
"""

from u8g2emu import EmulatorConfig, InputMapper, MenuEvent, MessageKind, Session, Translator


def send(callback, data_mode, payload):
    """One u8x8 transfer: select D/C, start, send, end."""
    callback(MessageKind.BYTE_SET_DC, int(data_mode), None)
    callback(MessageKind.BYTE_START_TRANSFER, 0, None)
    callback(MessageKind.BYTE_SEND, len(payload), payload)
    callback(MessageKind.BYTE_END_TRANSFER, 0, None)


def draw(callback, cursor):
    for page in range(8):
        send(callback, False, bytes([0xB0 + page, 0x00, 0x10]))
        fill = 0xFF if page == cursor else 0x81
        send(callback, True, bytes([fill] * 128))


def main():
    with Session(EmulatorConfig.from_env()) as session:
        display = Translator(session)
        menu = InputMapper(session)

        # ==========================================================================
        # Controller init: only page addressing matters to the emulator
        # ==========================================================================
        send(display.handle_message, False, bytes([0xAE, 0xA8, 0x3F, 0xAF]))

        cursor = 0
        draw(display.handle_message, cursor)

        while not menu.quit_requested:
            event = menu.next_menu_event()
            if event == MenuEvent.HOME:
                break
            if event == MenuEvent.DOWN:
                cursor = (cursor + 1) % 8
            elif event == MenuEvent.UP:
                cursor = (cursor - 1) % 8
            elif event == MenuEvent.SELECT:
                print(f"Selected line {cursor}")
            else:
                continue
            draw(display.handle_message, cursor)

        print(session.diagnostics.format_report())


if __name__ == "__main__":
    main()
