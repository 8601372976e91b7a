"""Virtual key codes understood by the input and console code."""

from __future__ import annotations

import enum


class KeyCode(enum.IntEnum):
    """Virtual key codes, one byte each."""

    LEFT_MOUSE = 0x01
    RIGHT_MOUSE = 0x02
    BACKSPACE = 0x08
    ENTER = 0x0D
    SHIFT = 0x10
    CONTROL = 0x11
    ESC = 0x1B
    END = 0x23
    HOME = 0x24
    LEFTARROW = 0x25
    UPARROW = 0x26
    RIGHTARROW = 0x27
    DOWNARROW = 0x28
    INSERT = 0x2D
    DELETE = 0x2E
    KEY_0 = 0x30
    KEY_1 = 0x31
    KEY_2 = 0x32
    KEY_3 = 0x33
    KEY_4 = 0x34
    KEY_5 = 0x35
    KEY_6 = 0x36
    KEY_7 = 0x37
    KEY_8 = 0x38
    KEY_9 = 0x39
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    TILDE = 0xC0
    LEFTBRACKET = 0xDB
    RIGHTBRACKET = 0xDD