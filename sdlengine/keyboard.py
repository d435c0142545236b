# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Keyboard state, key names and text input.

Scancodes name physical key positions and keycodes name what the current
layout puts there. Most functions need the video subsystem.

    >>> key = get_key_from_name("Space")
    >>> get_key_name(key)
    'Space'
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from . import errors, properties, stdinc
from ._dll import bind
from .rect import Rect
from .video import Window, _WindowP

__all__ = [
    "KEY_UNKNOWN",
    "SCANCODE_MASK",
    "SCANCODE_UNKNOWN",
    "Capitalization",
    "Keymod",
    "Scancode",
    "TextInputProperties",
    "TextInputType",
    "clear_composition",
    "get_focus",
    "get_key_from_name",
    "get_key_from_scancode",
    "get_key_name",
    "get_keyboards",
    "get_mod_state",
    "get_name_for_id",
    "get_scancode_from_key",
    "get_scancode_from_name",
    "get_scancode_name",
    "get_state",
    "get_text_input_area",
    "has_keyboard",
    "has_screen_keyboard_support",
    "reset",
    "scancode_to_keycode",
    "screen_keyboard_shown",
    "set_mod_state",
    "set_scancode_name",
    "set_text_input_area",
    "start_text_input",
    "stop_text_input",
    "text_input_active",
]


SCANCODE_UNKNOWN = 0
KEY_UNKNOWN = 0

#: Keycodes without a character representation are the scancode with this bit set.
SCANCODE_MASK = 1 << 30


class Scancode(IntEnum):
    """
    Physical key positions, following the USB HID usage page.

    Only the common keys are listed. Functions taking a scancode accept any int.
    """

    UNKNOWN = 0
    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    O = 18  # noqa: E741
    P = 19
    Q = 20
    R = 21
    S = 22
    T = 23
    U = 24
    V = 25
    W = 26
    X = 27
    Y = 28
    Z = 29
    NUM_1 = 30
    NUM_2 = 31
    NUM_3 = 32
    NUM_4 = 33
    NUM_5 = 34
    NUM_6 = 35
    NUM_7 = 36
    NUM_8 = 37
    NUM_9 = 38
    NUM_0 = 39
    RETURN = 40
    ESCAPE = 41
    BACKSPACE = 42
    TAB = 43
    SPACE = 44
    MINUS = 45
    EQUALS = 46
    LEFTBRACKET = 47
    RIGHTBRACKET = 48
    BACKSLASH = 49
    NONUSHASH = 50
    SEMICOLON = 51
    APOSTROPHE = 52
    GRAVE = 53
    COMMA = 54
    PERIOD = 55
    SLASH = 56
    CAPSLOCK = 57
    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69
    PRINTSCREEN = 70
    SCROLLLOCK = 71
    PAUSE = 72
    INSERT = 73
    HOME = 74
    PAGEUP = 75
    DELETE = 76
    END = 77
    PAGEDOWN = 78
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82
    NUMLOCKCLEAR = 83
    KP_DIVIDE = 84
    KP_MULTIPLY = 85
    KP_MINUS = 86
    KP_PLUS = 87
    KP_ENTER = 88
    KP_1 = 89
    KP_2 = 90
    KP_3 = 91
    KP_4 = 92
    KP_5 = 93
    KP_6 = 94
    KP_7 = 95
    KP_8 = 96
    KP_9 = 97
    KP_0 = 98
    KP_PERIOD = 99
    NONUSBACKSLASH = 100
    APPLICATION = 101
    POWER = 102
    KP_EQUALS = 103
    F13 = 104
    F14 = 105
    F15 = 106
    F16 = 107
    F17 = 108
    F18 = 109
    F19 = 110
    F20 = 111
    F21 = 112
    F22 = 113
    F23 = 114
    F24 = 115
    LCTRL = 224
    LSHIFT = 225
    LALT = 226
    LGUI = 227
    RCTRL = 228
    RSHIFT = 229
    RALT = 230
    RGUI = 231
    MODE = 257


class Keymod(IntFlag):
    NONE = 0x0000
    LSHIFT = 0x0001
    RSHIFT = 0x0002
    LEVEL5 = 0x0004
    LCTRL = 0x0040
    RCTRL = 0x0080
    LALT = 0x0100
    RALT = 0x0200
    LGUI = 0x0400
    RGUI = 0x0800
    NUM = 0x1000
    CAPS = 0x2000
    MODE = 0x4000
    SCROLL = 0x8000
    CTRL = LCTRL | RCTRL
    SHIFT = LSHIFT | RSHIFT
    ALT = LALT | RALT
    GUI = LGUI | RGUI


class TextInputType(IntEnum):
    TEXT = 0
    TEXT_NAME = 1
    TEXT_EMAIL = 2
    TEXT_USERNAME = 3
    TEXT_PASSWORD_HIDDEN = 4
    TEXT_PASSWORD_VISIBLE = 5
    NUMBER = 6
    NUMBER_PASSWORD_HIDDEN = 7
    NUMBER_PASSWORD_VISIBLE = 8


class Capitalization(IntEnum):
    NONE = 0
    SENTENCES = 1
    WORDS = 2
    LETTERS = 3


@dataclass
class TextInputProperties:
    """
    Properties for start_text_input(). Unset fields keep the platform defaults.
    """

    type: TextInputType | None = None
    capitalization: Capitalization | None = None
    autocorrect: bool | None = None
    multiline: bool | None = None
    android_inputtype: int | None = None

    PREFIX = "SDL.textinput."

    def apply(self, group: properties.Group) -> None:
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value is None:
                continue
            group.set(self.PREFIX + name.replace("_", "."), value)


_IntP = ctypes.POINTER(ctypes.c_int)

_SDL_HasKeyboard = bind("SDL_HasKeyboard", [], ctypes.c_bool)
_SDL_GetKeyboards = bind("SDL_GetKeyboards", [_IntP], ctypes.POINTER(ctypes.c_uint32))
_SDL_GetKeyboardNameForID = bind("SDL_GetKeyboardNameForID", [ctypes.c_uint32], ctypes.c_char_p)
_SDL_GetKeyboardFocus = bind("SDL_GetKeyboardFocus", [], _WindowP)
_SDL_GetKeyboardState = bind("SDL_GetKeyboardState", [_IntP], ctypes.POINTER(ctypes.c_bool))
_SDL_ResetKeyboard = bind("SDL_ResetKeyboard", [], None)
_SDL_GetModState = bind("SDL_GetModState", [], ctypes.c_uint16)
_SDL_SetModState = bind("SDL_SetModState", [ctypes.c_uint16], None)
_SDL_GetKeyFromScancode = bind(
    "SDL_GetKeyFromScancode", [ctypes.c_int, ctypes.c_uint16, ctypes.c_bool], ctypes.c_uint32
)
_SDL_GetScancodeFromKey = bind("SDL_GetScancodeFromKey", [ctypes.c_uint32, ctypes.POINTER(ctypes.c_uint16)], ctypes.c_int)
_SDL_SetScancodeName = bind("SDL_SetScancodeName", [ctypes.c_int, ctypes.c_char_p], ctypes.c_bool)
_SDL_GetScancodeName = bind("SDL_GetScancodeName", [ctypes.c_int], ctypes.c_char_p)
_SDL_GetScancodeFromName = bind("SDL_GetScancodeFromName", [ctypes.c_char_p], ctypes.c_int)
_SDL_GetKeyName = bind("SDL_GetKeyName", [ctypes.c_uint32], ctypes.c_char_p)
_SDL_GetKeyFromName = bind("SDL_GetKeyFromName", [ctypes.c_char_p], ctypes.c_uint32)
_SDL_StartTextInput = bind("SDL_StartTextInput", [_WindowP], ctypes.c_bool)
_SDL_StartTextInputWithProperties = bind(
    "SDL_StartTextInputWithProperties", [_WindowP, ctypes.c_uint32], ctypes.c_bool
)
_SDL_TextInputActive = bind("SDL_TextInputActive", [_WindowP], ctypes.c_bool)
_SDL_StopTextInput = bind("SDL_StopTextInput", [_WindowP], ctypes.c_bool)
_SDL_ClearComposition = bind("SDL_ClearComposition", [_WindowP], ctypes.c_bool)
_SDL_SetTextInputArea = bind("SDL_SetTextInputArea", [_WindowP, ctypes.POINTER(Rect), ctypes.c_int], ctypes.c_bool)
_SDL_GetTextInputArea = bind("SDL_GetTextInputArea", [_WindowP, ctypes.POINTER(Rect), _IntP], ctypes.c_bool)
_SDL_HasScreenKeyboardSupport = bind("SDL_HasScreenKeyboardSupport", [], ctypes.c_bool)
_SDL_ScreenKeyboardShown = bind("SDL_ScreenKeyboardShown", [_WindowP], ctypes.c_bool)

# SDL keeps the pointer it is given, so the encoded names must stay alive.
_scancode_names: dict[int, bytes] = {}


def scancode_to_keycode(scancode: int) -> int:
    """
    :return: The keycode SDL uses for a key without a character representation.
    """
    return scancode | SCANCODE_MASK


def has_keyboard() -> bool:
    return bool(_SDL_HasKeyboard())


def get_keyboards() -> list[int]:
    """
    :return: The instance ids of the currently connected keyboards.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetKeyboards(ctypes.byref(count)))
    return stdinc.take_array(array, count.value)


def get_name_for_id(keyboard_id: int) -> str | None:
    """
    :return: The name of the keyboard, or None if it has none.
    """
    name = errors.check_null(_SDL_GetKeyboardNameForID(keyboard_id))
    return name.decode("utf-8") or None


def get_focus() -> Window | None:
    pointer = _SDL_GetKeyboardFocus()
    return Window(pointer) if pointer else None


def get_state() -> tuple[bool, ...]:
    """
    Get a snapshot of the keyboard, indexed by scancode.

    The state is updated while events are processed.
    """
    count = ctypes.c_int()
    pointer = _SDL_GetKeyboardState(ctypes.byref(count))
    return tuple(pointer[: count.value])


def reset() -> None:
    """
    Release every key, generating key-up events for keys that were held.
    """
    _SDL_ResetKeyboard()


def get_mod_state() -> Keymod:
    return Keymod(_SDL_GetModState())


def set_mod_state(modstate: Keymod) -> None:
    """
    Override the modifier state SDL reports. No key events are generated.
    """
    _SDL_SetModState(modstate)


def get_key_from_scancode(scancode: int, modstate: Keymod = Keymod.NONE, key_event: bool = False) -> int | None:
    """
    Get the keycode the current layout maps a scancode to.

    :param key_event: Resolve the key the way key events report it,
                      which respects the SDL_HINT_KEYCODE_OPTIONS hint.
    :return: The keycode, or None if the scancode maps to nothing.
    """
    key = _SDL_GetKeyFromScancode(scancode, modstate, key_event)
    return None if key == KEY_UNKNOWN else key


def get_scancode_from_key(key: int) -> tuple[int, Keymod] | None:
    """
    :return: The first scancode producing the key and the modifiers it needs, or None.
    """
    modstate = ctypes.c_uint16()
    scancode = _SDL_GetScancodeFromKey(key, ctypes.byref(modstate))
    if scancode == SCANCODE_UNKNOWN:
        return None
    return scancode, Keymod(modstate.value)


def set_scancode_name(scancode: int, name: str) -> None:
    encoded = name.encode("utf-8")
    errors.check_bool(_SDL_SetScancodeName(scancode, encoded))
    _scancode_names[scancode] = encoded


def get_scancode_name(scancode: int) -> str | None:
    return _SDL_GetScancodeName(scancode).decode("utf-8") or None


def get_scancode_from_name(name: str) -> int:
    """
    :raises SdlError: If the name is not recognized.
    """
    return errors.check(_SDL_GetScancodeFromName(name.encode("utf-8")), SCANCODE_UNKNOWN)


def get_key_name(key: int) -> str | None:
    return _SDL_GetKeyName(key).decode("utf-8") or None


def get_key_from_name(name: str) -> int:
    """
    :raises SdlError: If the name is not recognized.
    """
    return errors.check(_SDL_GetKeyFromName(name.encode("utf-8")), KEY_UNKNOWN)


def start_text_input(window: Window, props: TextInputProperties | None = None) -> None:
    """
    Start sending text input events to the window. This may show a screen keyboard.
    """
    if props is None:
        errors.check_bool(_SDL_StartTextInput(window.pointer))
        return

    with properties.Group.create() as group:
        props.apply(group)
        errors.check_bool(_SDL_StartTextInputWithProperties(window.pointer, group.value))


def text_input_active(window: Window) -> bool:
    return bool(_SDL_TextInputActive(window.pointer))


def stop_text_input(window: Window) -> None:
    errors.check_bool(_SDL_StopTextInput(window.pointer))


def clear_composition(window: Window) -> None:
    """
    Dismiss the IME composition without disabling text input.
    """
    errors.check_bool(_SDL_ClearComposition(window.pointer))


def set_text_input_area(window: Window, area: Rect | None, cursor: int = 0) -> None:
    """
    Tell the IME where text is typed so candidate lists do not cover it.

    :param cursor: The offset of the text cursor from the left edge of the area.
    """
    errors.check_bool(_SDL_SetTextInputArea(window.pointer, None if area is None else ctypes.byref(area), cursor))


def get_text_input_area(window: Window) -> tuple[Rect, int]:
    """
    :return: The text input area and the cursor offset within it.
    """
    area = Rect()
    cursor = ctypes.c_int()
    errors.check_bool(_SDL_GetTextInputArea(window.pointer, ctypes.byref(area), ctypes.byref(cursor)))
    return area, cursor.value


def has_screen_keyboard_support() -> bool:
    return bool(_SDL_HasScreenKeyboardSupport())


def screen_keyboard_shown(window: Window) -> bool:
    return bool(_SDL_ScreenKeyboardShown(window.pointer))
