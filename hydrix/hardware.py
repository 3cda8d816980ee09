"""Keyboard scancodes, driver kinds and display description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class KeyCode(IntEnum):
    """PS/2 set 1 make codes; keypad keys sharing a code are aliases."""

    KEY_A = 0x1E
    KEY_B = 0x30
    KEY_C = 0x2E
    KEY_D = 0x20
    KEY_E = 0x12
    KEY_F = 0x21
    KEY_G = 0x22
    KEY_H = 0x23
    KEY_I = 0x17
    KEY_J = 0x24
    KEY_K = 0x25
    KEY_L = 0x26
    KEY_M = 0x32
    KEY_N = 0x31
    KEY_O = 0x18
    KEY_P = 0x19
    KEY_Q = 0x10
    KEY_R = 0x13
    KEY_S = 0x1F
    KEY_T = 0x14
    KEY_U = 0x16
    KEY_V = 0x2F
    KEY_W = 0x11
    KEY_X = 0x2D
    KEY_Y = 0x15
    KEY_Z = 0x2C
    KEY_1 = 0x02
    KEY_2 = 0x03
    KEY_3 = 0x04
    KEY_4 = 0x05
    KEY_5 = 0x06
    KEY_6 = 0x07
    KEY_7 = 0x08
    KEY_8 = 0x09
    KEY_9 = 0x0A
    KEY_0 = 0x0B
    KEY_ENTER = 0x1C
    KEY_ESC = 0x01
    KEY_BACKSPACE = 0x0E
    KEY_TAB = 0x0F
    KEY_SPACE = 0x39
    KEY_MINUS = 0x0C
    KEY_EQUAL = 0x0D
    KEY_LEFTBRACKET = 0x1A
    KEY_RIGHTBRACKET = 0x1B
    KEY_BACKSLASH = 0x2B
    KEY_SEMICOLON = 0x27
    KEY_APOSTROPHE = 0x28
    KEY_GRAVE = 0x29
    KEY_COMMA = 0x33
    KEY_PERIOD = 0x34
    KEY_SLASH = 0x35
    KEY_CAPSLOCK = 0x3A
    KEY_F1 = 0x3B
    KEY_F2 = 0x3C
    KEY_F3 = 0x3D
    KEY_F4 = 0x3E
    KEY_F5 = 0x3F
    KEY_F6 = 0x40
    KEY_F7 = 0x41
    KEY_F8 = 0x42
    KEY_F9 = 0x43
    KEY_F10 = 0x44
    KEY_F11 = 0x57
    KEY_F12 = 0x58
    KEY_PRINTSCREEN = 0x37
    KEY_SCROLLLOCK = 0x46
    KEY_PAUSE = 0x45
    KEY_INSERT = 0x52
    KEY_HOME = 0x47
    KEY_PAGEUP = 0x49
    KEY_DELETE = 0x53
    KEY_END = 0x4F
    KEY_PAGEDOWN = 0x51
    KEY_RIGHT = 0x4D
    KEY_LEFT = 0x4B
    KEY_DOWN = 0x50
    KEY_UP = 0x48
    KEY_NUMLOCK = 0x45
    KEY_KP_DIVIDE = 0xB5
    KEY_KP_MULTIPLY = 0x37
    KEY_KP_MINUS = 0x4A
    KEY_KP_PLUS = 0x4E
    KEY_KP_ENTER = 0x9C
    KEY_KP_1 = 0x4F
    KEY_KP_2 = 0x50
    KEY_KP_3 = 0x51
    KEY_KP_4 = 0x4B
    KEY_KP_5 = 0x4C
    KEY_KP_6 = 0x4D
    KEY_KP_7 = 0x47
    KEY_KP_8 = 0x48
    KEY_KP_9 = 0x49
    KEY_KP_0 = 0x52
    KEY_KP_PERIOD = 0x53
    KEY_LCTRL = 0x1D
    KEY_LSHIFT = 0x2A
    KEY_LALT = 0x38
    KEY_LGUI = 0xDB
    KEY_RCTRL = 0x9D
    KEY_RSHIFT = 0x36
    KEY_RALT = 0xB8
    KEY_RGUI = 0xDC


class DeviceDriver(IntEnum):
    """Kinds of generic device driver."""

    PS2Keyboard = 0
    PS2Mouse = 1
    GOPGraphics = 2
    InterruptHandler = 3
    GDT = 4
    PCI = 5
    PIC = 6
    PIT = 7
    RTC = 8
    Serial = 9


@dataclass
class DisplayInfo:
    """Framebuffer address, bits per pixel, size in pixels and refresh in Hz."""

    address: int = 0
    bpp: int = 0
    width: int = 0
    height: int = 0
    refresh: int = 0


def keycode_for(scancode: int) -> KeyCode:
    """The key for a scancode; raises ValueError for an unknown one."""
    try:
        return KeyCode(scancode)
    except ValueError:
        raise ValueError(f"unknown scancode {scancode:#x}") from None