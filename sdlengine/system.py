# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Platform specific system queries and application lifecycle notifications.
"""

import ctypes
from enum import IntEnum

from ._dll import bind

__all__ = [
    "Sandbox",
    "get_sandbox",
    "is_tablet",
    "is_tv",
    "on_application_did_enter_background",
    "on_application_did_enter_foreground",
    "on_application_did_receive_memory_warning",
    "on_application_will_enter_background",
    "on_application_will_enter_foreground",
    "on_application_will_terminate",
]


class Sandbox(IntEnum):
    NONE = 0
    UNKNOWN_CONTAINER = 1
    FLATPAK = 2
    SNAP = 3
    MACOS = 4


_SDL_GetSandbox = bind("SDL_GetSandbox", [], ctypes.c_int)
_SDL_IsTablet = bind("SDL_IsTablet", [], ctypes.c_bool)
_SDL_IsTV = bind("SDL_IsTV", [], ctypes.c_bool)
_SDL_OnApplicationWillTerminate = bind("SDL_OnApplicationWillTerminate", [], None)
_SDL_OnApplicationDidReceiveMemoryWarning = bind("SDL_OnApplicationDidReceiveMemoryWarning", [], None)
_SDL_OnApplicationWillEnterBackground = bind("SDL_OnApplicationWillEnterBackground", [], None)
_SDL_OnApplicationDidEnterBackground = bind("SDL_OnApplicationDidEnterBackground", [], None)
_SDL_OnApplicationWillEnterForeground = bind("SDL_OnApplicationWillEnterForeground", [], None)
_SDL_OnApplicationDidEnterForeground = bind("SDL_OnApplicationDidEnterForeground", [], None)


def get_sandbox() -> Sandbox | None:
    """
    :return: The sandbox the application runs in, or None if it does not run in one.
    """
    sandbox = Sandbox(_SDL_GetSandbox())
    return None if sandbox == Sandbox.NONE else sandbox


def is_tablet() -> bool:
    return bool(_SDL_IsTablet())


def is_tv() -> bool:
    return bool(_SDL_IsTV())


# Only needed when SDL does not drive the application's main loop (for example on iOS with a custom delegate).


def on_application_will_terminate() -> None:
    _SDL_OnApplicationWillTerminate()


def on_application_did_receive_memory_warning() -> None:
    _SDL_OnApplicationDidReceiveMemoryWarning()


def on_application_will_enter_background() -> None:
    _SDL_OnApplicationWillEnterBackground()


def on_application_did_enter_background() -> None:
    _SDL_OnApplicationDidEnterBackground()


def on_application_will_enter_foreground() -> None:
    _SDL_OnApplicationWillEnterForeground()


def on_application_did_enter_foreground() -> None:
    _SDL_OnApplicationDidEnterForeground()
