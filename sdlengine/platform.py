# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Information about the platform SDL runs on.

The flags are derived from the running interpreter, so they describe the
platform the loaded SDL library was built for.
"""

import ctypes
import sys

from ._dll import bind

__all__ = [
    "aix",
    "android",
    "apple",
    "cygwin",
    "emscripten",
    "free_bsd",
    "get",
    "haiku",
    "ios",
    "linux",
    "macos",
    "net_bsd",
    "open_bsd",
    "solaris",
    "unix",
    "win32",
    "windows",
]


aix = sys.platform.startswith("aix")
android = sys.platform == "android" or hasattr(sys, "getandroidapilevel")
cygwin = sys.platform == "cygwin"
emscripten = sys.platform == "emscripten"
free_bsd = sys.platform.startswith("freebsd")
haiku = sys.platform.startswith("haiku")
ios = sys.platform == "ios"
linux = sys.platform.startswith("linux") and not android
macos = sys.platform == "darwin"
net_bsd = sys.platform.startswith("netbsd")
open_bsd = sys.platform.startswith("openbsd")
solaris = sys.platform.startswith("sunos")
win32 = sys.platform == "win32"
windows = win32 or cygwin

#: Includes macOS and iOS.
apple = macos or ios
#: Any system with a Unix-like environment, including Linux, the BSDs and Apple systems.
unix = not windows and not emscripten


_SDL_GetPlatform = bind("SDL_GetPlatform", [], ctypes.c_char_p)


def get() -> str:
    """
    :return: The name of the platform, as reported by SDL ("Windows", "macOS", "Linux", ...).
    """
    return _SDL_GetPlatform().decode("utf-8")
