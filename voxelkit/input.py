"""Keyboard and mouse codes, their display names, and named input bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass

KEY_UNKNOWN = -1

KEY_SPACE = 32
KEY_APOSTROPHE = 39
KEY_COMMA = 44
KEY_MINUS = 45
KEY_PERIOD = 46
KEY_SLASH = 47
KEY_NUM_0 = 48
KEY_NUM_1 = 49
KEY_NUM_2 = 50
KEY_NUM_3 = 51
KEY_NUM_4 = 52
KEY_NUM_5 = 53
KEY_NUM_6 = 54
KEY_NUM_7 = 55
KEY_NUM_8 = 56
KEY_NUM_9 = 57
KEY_SEMICOLON = 59
KEY_EQUAL = 61
KEY_A = 65
KEY_B = 66
KEY_C = 67
KEY_D = 68
KEY_E = 69
KEY_F = 70
KEY_G = 71
KEY_H = 72
KEY_I = 73
KEY_J = 74
KEY_K = 75
KEY_L = 76
KEY_M = 77
KEY_N = 78
KEY_O = 79
KEY_P = 80
KEY_Q = 81
KEY_R = 82
KEY_S = 83
KEY_T = 84
KEY_U = 85
KEY_V = 86
KEY_W = 87
KEY_X = 88
KEY_Y = 89
KEY_Z = 90
KEY_LEFT_BRACKET = 91
KEY_BACKSLASH = 92
KEY_RIGHT_BRACKET = 93
KEY_GRAVE_ACCENT = 96

KEY_ESCAPE = 256
KEY_ENTER = 257
KEY_TAB = 258
KEY_BACKSPACE = 259
KEY_INSERT = 260
KEY_DELETE = 261
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265
KEY_PAGE_UP = 266
KEY_PAGE_DOWN = 267
KEY_HOME = 268
KEY_END = 269
KEY_CAPS_LOCK = 280
KEY_SCROLL_LOCK = 281
KEY_NUM_LOCK = 282
KEY_PRINT_SCREEN = 283
KEY_PAUSE = 284
KEY_F1 = 290
KEY_F2 = 291
KEY_F3 = 292
KEY_F4 = 293
KEY_F5 = 294
KEY_F6 = 295
KEY_F7 = 296
KEY_F8 = 297
KEY_F9 = 298
KEY_F10 = 299
KEY_F11 = 300
KEY_F12 = 301
KEY_LEFT_SHIFT = 340
KEY_LEFT_CONTROL = 341
KEY_LEFT_ALT = 342
KEY_LEFT_SUPER = 343
KEY_RIGHT_SHIFT = 344
KEY_RIGHT_CONTROL = 345
KEY_RIGHT_ALT = 346
KEY_RIGHT_SUPER = 347
KEY_MENU = 348

MOUSE_BUTTON_1 = 0
MOUSE_BUTTON_2 = 1
MOUSE_BUTTON_3 = 2

# Keys whose name is the character they type.
_PRINTABLE_KEYS = frozenset(
    [KEY_APOSTROPHE, KEY_COMMA, KEY_MINUS, KEY_PERIOD, KEY_SLASH,
     KEY_SEMICOLON, KEY_EQUAL, KEY_LEFT_BRACKET, KEY_BACKSLASH,
     KEY_RIGHT_BRACKET, KEY_GRAVE_ACCENT]
    + list(range(KEY_NUM_0, KEY_NUM_9 + 1))
    + list(range(KEY_A, KEY_Z + 1))
)

_KEY_NAMES = {
    KEY_TAB: "Tab",
    KEY_LEFT_CONTROL: "Left Ctrl",
    KEY_RIGHT_CONTROL: "Right Ctrl",
    KEY_LEFT_ALT: "Left Alt",
    KEY_RIGHT_ALT: "Right Alt",
    KEY_LEFT_SHIFT: "Left Shift",
    KEY_RIGHT_SHIFT: "Right Shift",
    KEY_CAPS_LOCK: "Caps-Lock",
    KEY_SPACE: "Space",
    KEY_ESCAPE: "Esc",
    KEY_ENTER: "Enter",
    KEY_UP: "Up",
    KEY_DOWN: "Down",
    KEY_LEFT: "Left",
    KEY_RIGHT: "Right",
    KEY_BACKSPACE: "Backspace",
    KEY_F1: "F1",
    KEY_F2: "F2",
    KEY_F3: "F3",
    KEY_F4: "F4",
    KEY_F5: "F5",
    KEY_F6: "F6",
    KEY_F7: "F7",
    KEY_F8: "F8",
    KEY_F9: "F9",
    KEY_F10: "F10",
    KEY_F11: "F11",
    KEY_F12: "F12",
    KEY_DELETE: "Delete",
    KEY_HOME: "Home",
    KEY_END: "End",
    KEY_LEFT_SUPER: "Left Super",
    KEY_RIGHT_SUPER: "Right Super",
    KEY_PAGE_UP: "Page Up",
    KEY_PAGE_DOWN: "Page Down",
    KEY_INSERT: "Insert",
    KEY_PRINT_SCREEN: "Print Screen",
    KEY_NUM_LOCK: "Num Lock",
    KEY_MENU: "Menu",
    KEY_PAUSE: "Pause",
}

_MOUSE_NAMES = {
    MOUSE_BUTTON_1: "LMB",
    MOUSE_BUTTON_2: "RMB",
    MOUSE_BUTTON_3: "MMB",
}


def key_name(code: int) -> str:
    """Return a display name for a keyboard key code."""
    if code in _PRINTABLE_KEYS:
        return chr(code).lower()
    return _KEY_NAMES.get(code, "Unknown")


def mouse_name(code: int) -> str:
    """Return a display name for a mouse button code."""
    return _MOUSE_NAMES.get(code, "unknown button")


class InputType(enum.Enum):
    """Device an input binding listens to."""

    keyboard = "keyboard"
    mouse = "mouse"


@dataclass
class Binding:
    """A key or mouse button with its current and just-changed state."""

    type: InputType
    code: int
    state: bool = False
    just_change: bool = False

    def active(self) -> bool:
        """Return True while the input is held."""
        return self.state

    def jactive(self) -> bool:
        """Return True only in the frame the input became held."""
        return self.state and self.just_change

    def text(self) -> str:
        """Return a display name of the bound input."""
        if self.type is InputType.keyboard:
            return key_name(self.code)
        if self.type is InputType.mouse:
            return mouse_name(self.code)
        return "<unknown input type>"