# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Counters, delays and timers.

Timer callbacks run on a separate thread. They return the interval until
they should run again, or 0 to stop the timer. A callback that raises is
logged and stopped.
"""

import ctypes
from collections.abc import Callable
from logging import getLogger
from typing import Any, Self

from . import errors
from ._callbacks import Registry
from ._dll import bind

__all__ = [
    "MS_PER_SECOND",
    "NS_PER_MS",
    "NS_PER_SECOND",
    "NS_PER_US",
    "US_PER_SECOND",
    "Timer",
    "TimerCallback",
    "delay",
    "delay_ns",
    "delay_precise",
    "get_performance_counter",
    "get_performance_frequency",
    "get_ticks",
    "get_ticks_ns",
    "ms_to_ns",
    "ns_to_ms",
    "ns_to_seconds",
    "ns_to_us",
    "seconds_to_ns",
    "us_to_ns",
]


logger = getLogger(__name__)

MS_PER_SECOND = 1000
US_PER_SECOND = 1000000
NS_PER_SECOND = 1000000000
NS_PER_MS = 1000000
NS_PER_US = 1000


def seconds_to_ns(seconds: int) -> int:
    return seconds * NS_PER_SECOND


def ns_to_seconds(ns: int) -> int:
    return ns // NS_PER_SECOND


def ms_to_ns(ms: int) -> int:
    return ms * NS_PER_MS


def ns_to_ms(ns: int) -> int:
    return ns // NS_PER_MS


def us_to_ns(us: int) -> int:
    return us * NS_PER_US


def ns_to_us(ns: int) -> int:
    return ns // NS_PER_US


_NativeTimerCallback = ctypes.CFUNCTYPE(ctypes.c_uint32, ctypes.c_void_p, ctypes.c_uint32, ctypes.c_uint32)
_NativeNSTimerCallback = ctypes.CFUNCTYPE(ctypes.c_uint64, ctypes.c_void_p, ctypes.c_uint32, ctypes.c_uint64)

_SDL_GetTicks = bind("SDL_GetTicks", [], ctypes.c_uint64)
_SDL_GetTicksNS = bind("SDL_GetTicksNS", [], ctypes.c_uint64)
_SDL_GetPerformanceCounter = bind("SDL_GetPerformanceCounter", [], ctypes.c_uint64)
_SDL_GetPerformanceFrequency = bind("SDL_GetPerformanceFrequency", [], ctypes.c_uint64)
_SDL_Delay = bind("SDL_Delay", [ctypes.c_uint32], None)
_SDL_DelayNS = bind("SDL_DelayNS", [ctypes.c_uint64], None)
_SDL_DelayPrecise = bind("SDL_DelayPrecise", [ctypes.c_uint64], None)
_SDL_AddTimer = bind("SDL_AddTimer", [ctypes.c_uint32, _NativeTimerCallback, ctypes.c_void_p], ctypes.c_uint32)
_SDL_AddTimerNS = bind("SDL_AddTimerNS", [ctypes.c_uint64, _NativeNSTimerCallback, ctypes.c_void_p], ctypes.c_uint32)
_SDL_RemoveTimer = bind("SDL_RemoveTimer", [ctypes.c_uint32], ctypes.c_bool)


def get_ticks() -> int:
    """
    :return: Milliseconds since SDL was initialized.
    """
    return _SDL_GetTicks()


def get_ticks_ns() -> int:
    return _SDL_GetTicksNS()


def get_performance_counter() -> int:
    return _SDL_GetPerformanceCounter()


def get_performance_frequency() -> int:
    """
    :return: The number of performance counter ticks per second.
    """
    return _SDL_GetPerformanceFrequency()


def delay(ms: int) -> None:
    _SDL_Delay(ms)


def delay_ns(ns: int) -> None:
    _SDL_DelayNS(ns)


def delay_precise(ns: int) -> None:
    """
    Wait for the given amount of nanoseconds, busy waiting for the last part.
    """
    _SDL_DelayPrecise(ns)


type TimerCallback = Callable[["Timer", int], int]

_timers = Registry["Timer"]("sdlengine.timer")


def _fire(handle: int | None, interval: int) -> int:
    timer = _timers.get(handle)
    if timer is None:
        return 0

    try:
        result = int(timer.callback(timer, interval))
    except Exception:
        logger.exception(f"Timer {timer.id} failed and was stopped.")
        result = 0

    if result <= 0:
        _timers.pop(handle)
        return 0
    return result


@_NativeTimerCallback
def _fire_ms(userdata: int | None, _timer_id: int, interval: int) -> int:
    return _fire(userdata, interval)


@_NativeNSTimerCallback
def _fire_ns(userdata: int | None, _timer_id: int, interval: int) -> int:
    return _fire(userdata, interval)


class Timer:
    """
    A timer calling a Python function periodically.

    :ivar callback: Called with the timer and the current interval. Returns the next interval.
    """

    __slots__ = ("_handle", "callback", "id")

    def __init__(self, callback: TimerCallback) -> None:
        self.callback = callback
        self.id = 0
        self._handle = 0

    def __repr__(self) -> str:
        return f"<Timer {self.id} {'active' if self.active else 'stopped'}>"

    @classmethod
    def _add(cls, adder: Any, trampoline: Any, interval: int, callback: TimerCallback) -> Self:
        timer = cls(callback)
        timer._handle = _timers.add(timer)
        try:
            timer.id = errors.check_id(adder(interval, trampoline, timer._handle))
        except errors.SdlError:
            _timers.pop(timer._handle)
            raise
        return timer

    @classmethod
    def add_milliseconds(cls, interval: int, callback: TimerCallback) -> Self:
        """
        Start a timer.

        :param interval: Milliseconds until the first call.
        """
        return cls._add(_SDL_AddTimer, _fire_ms, interval, callback)

    @classmethod
    def add_nanoseconds(cls, interval: int, callback: TimerCallback) -> Self:
        return cls._add(_SDL_AddTimerNS, _fire_ns, interval, callback)

    @property
    def active(self) -> bool:
        return self._handle in _timers

    def remove(self) -> None:
        """
        Stop the timer. Stopping a timer that is not running raises SdlError.
        """
        try:
            errors.check_bool(_SDL_RemoveTimer(self.id))
        finally:
            _timers.pop(self._handle)
