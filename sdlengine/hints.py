# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Configuration variables ("hints") that change SDL's behaviour.

Hints are identified by name. The names of commonly used hints are listed
in Hint, but any string is accepted.

    >>> set_hint(Hint.RENDER_VSYNC, "1")
    >>> get_boolean(Hint.RENDER_VSYNC)
    True
"""

import ctypes
from collections.abc import Callable
from enum import IntEnum, StrEnum
from logging import getLogger

from . import errors
from ._callbacks import Registry
from ._dll import bind

__all__ = [
    "Hint",
    "HintCallback",
    "Priority",
    "add_callback",
    "get_boolean",
    "get_hint",
    "remove_callback",
    "reset_all",
    "reset_hint",
    "set_hint",
    "set_hint_with_priority",
]


logger = getLogger(__name__)

type HintCallback = Callable[[str, str | None, str | None], None]


class Priority(IntEnum):
    DEFAULT = 0
    NORMAL = 1
    OVERRIDE = 2


class Hint(StrEnum):
    ALLOW_ALT_TAB_WHILE_GRABBED = "SDL_ALLOW_ALT_TAB_WHILE_GRABBED"
    ANDROID_ALLOW_RECREATE_ACTIVITY = "SDL_ANDROID_ALLOW_RECREATE_ACTIVITY"
    ANDROID_BLOCK_ON_PAUSE = "SDL_ANDROID_BLOCK_ON_PAUSE"
    ANDROID_LOW_LATENCY_AUDIO = "SDL_ANDROID_LOW_LATENCY_AUDIO"
    ANDROID_TRAP_BACK_BUTTON = "SDL_ANDROID_TRAP_BACK_BUTTON"
    APP_ID = "SDL_APP_ID"
    APP_NAME = "SDL_APP_NAME"
    APPLE_TV_CONTROLLER_UI_EVENTS = "SDL_APPLE_TV_CONTROLLER_UI_EVENTS"
    AUDIO_DEVICE_SAMPLE_FRAMES = "SDL_AUDIO_DEVICE_SAMPLE_FRAMES"
    AUDIO_DRIVER = "SDL_AUDIO_DRIVER"
    AUDIO_INCLUDE_MONITORS = "SDL_AUDIO_INCLUDE_MONITORS"
    CAMERA_DRIVER = "SDL_CAMERA_DRIVER"
    EVENT_LOGGING = "SDL_EVENT_LOGGING"
    FRAMEBUFFER_ACCELERATION = "SDL_FRAMEBUFFER_ACCELERATION"
    JOYSTICK_ALLOW_BACKGROUND_EVENTS = "SDL_JOYSTICK_ALLOW_BACKGROUND_EVENTS"
    JOYSTICK_HIDAPI = "SDL_JOYSTICK_HIDAPI"
    LOGGING = "SDL_LOGGING"
    MAIN_CALLBACK_RATE = "SDL_MAIN_CALLBACK_RATE"
    MOUSE_RELATIVE_MODE_CENTER = "SDL_MOUSE_RELATIVE_MODE_CENTER"
    NO_SIGNAL_HANDLERS = "SDL_NO_SIGNAL_HANDLERS"
    QUIT_ON_LAST_WINDOW_CLOSE = "SDL_QUIT_ON_LAST_WINDOW_CLOSE"
    RENDER_DRIVER = "SDL_RENDER_DRIVER"
    RENDER_VSYNC = "SDL_RENDER_VSYNC"
    TIMER_RESOLUTION = "SDL_TIMER_RESOLUTION"
    VIDEO_ALLOW_SCREENSAVER = "SDL_VIDEO_ALLOW_SCREENSAVER"
    VIDEO_DRIVER = "SDL_VIDEO_DRIVER"
    VIDEO_X11_NET_WM_BYPASS_COMPOSITOR = "SDL_VIDEO_X11_NET_WM_BYPASS_COMPOSITOR"
    WINDOW_ACTIVATE_WHEN_SHOWN = "SDL_WINDOW_ACTIVATE_WHEN_SHOWN"


_NativeHintCallback = ctypes.CFUNCTYPE(None, ctypes.c_void_p, ctypes.c_char_p, ctypes.c_char_p, ctypes.c_char_p)

_SDL_SetHint = bind("SDL_SetHint", [ctypes.c_char_p, ctypes.c_char_p], ctypes.c_bool)
_SDL_SetHintWithPriority = bind(
    "SDL_SetHintWithPriority", [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_int], ctypes.c_bool
)
_SDL_GetHint = bind("SDL_GetHint", [ctypes.c_char_p], ctypes.c_char_p)
_SDL_GetHintBoolean = bind("SDL_GetHintBoolean", [ctypes.c_char_p, ctypes.c_bool], ctypes.c_bool)
_SDL_ResetHint = bind("SDL_ResetHint", [ctypes.c_char_p], ctypes.c_bool)
_SDL_ResetHints = bind("SDL_ResetHints", [], None)
_SDL_AddHintCallback = bind(
    "SDL_AddHintCallback", [ctypes.c_char_p, _NativeHintCallback, ctypes.c_void_p], ctypes.c_bool
)
_SDL_RemoveHintCallback = bind("SDL_RemoveHintCallback", [ctypes.c_char_p, _NativeHintCallback, ctypes.c_void_p], None)


def _decode(raw: bytes | None) -> str | None:
    return None if raw is None else raw.decode("utf-8")


def set_hint(name: Hint | str, value: str | None) -> None:
    """
    Set a hint with normal priority.

    Hints will not be set if there is an existing override hint or environment variable that takes precedence.
    """
    errors.check_bool(_SDL_SetHint(str(name).encode("utf-8"), None if value is None else value.encode("utf-8")))


def set_hint_with_priority(name: Hint | str, value: str | None, priority: Priority) -> None:
    errors.check_bool(
        _SDL_SetHintWithPriority(
            str(name).encode("utf-8"), None if value is None else value.encode("utf-8"), priority
        )
    )


def get_hint(name: Hint | str) -> str | None:
    """
    :return: The value of the hint or None if it is not set.
    """
    return _decode(_SDL_GetHint(str(name).encode("utf-8")))


def get_boolean(name: Hint | str, default: bool = False) -> bool:
    return bool(_SDL_GetHintBoolean(str(name).encode("utf-8"), default))


def reset_hint(name: Hint | str) -> None:
    """
    Reset a hint to the default value.

    This will reset a hint to the value of the environment variable, or None if it is not set.
    """
    errors.check_bool(_SDL_ResetHint(str(name).encode("utf-8")))


def reset_all() -> None:
    """
    Reset all hints to the default values.
    """
    _SDL_ResetHints()


_callbacks = Registry[HintCallback]("sdlengine.hints")


@_NativeHintCallback
def _dispatch(userdata: int | None, name: bytes | None, old: bytes | None, new: bytes | None) -> None:
    callback = _callbacks.get(userdata)
    if callback is None:
        return

    try:
        callback(_decode(name) or "", _decode(old), _decode(new))
    except Exception:
        logger.exception("Hint callback failed.")


def add_callback(name: Hint | str, callback: HintCallback) -> int:
    """
    Add a function to watch a particular hint.

    The callback is called immediately with the current value of the hint.

    :param callback: Called with the name, the old value and the new value.
    :return: A handle to pass to remove_callback().
    """
    handle = _callbacks.add(callback)
    try:
        errors.check_bool(_SDL_AddHintCallback(str(name).encode("utf-8"), _dispatch, handle))
    except errors.SdlError:
        _callbacks.pop(handle)
        raise
    return handle


def remove_callback(name: Hint | str, handle: int) -> None:
    """
    Remove a function watching a particular hint.
    """
    _SDL_RemoveHintCallback(str(name).encode("utf-8"), _dispatch, handle)
    _callbacks.pop(handle)
