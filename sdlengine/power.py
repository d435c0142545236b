# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Power supply status.
"""

import ctypes
from enum import IntEnum
from typing import NamedTuple

from . import errors
from ._dll import bind

__all__ = ["PowerInfo", "PowerState", "get_info"]


class PowerState(IntEnum):
    ERROR = -1
    UNKNOWN = 0
    ON_BATTERY = 1
    NO_BATTERY = 2
    CHARGING = 3
    CHARGED = 4


class PowerInfo(NamedTuple):
    state: PowerState
    #: Seconds of battery life left, if known.
    seconds_left: int | None
    #: Percentage of battery life left (0 - 100), if known.
    percent: int | None


_SDL_GetPowerInfo = bind("SDL_GetPowerInfo", [ctypes.POINTER(ctypes.c_int), ctypes.POINTER(ctypes.c_int)], ctypes.c_int)


def get_info() -> PowerInfo:
    """
    Get the current power supply details.

    Battery readings are estimates. Poll this regularly if you depend on it.
    """
    seconds, percent = ctypes.c_int(-1), ctypes.c_int(-1)
    state = errors.check(_SDL_GetPowerInfo(ctypes.byref(seconds), ctypes.byref(percent)), PowerState.ERROR)
    return PowerInfo(
        PowerState(state),
        None if seconds.value == -1 else seconds.value,
        None if percent.value == -1 else percent.value,
    )
