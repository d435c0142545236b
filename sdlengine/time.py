# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Real time clock and date handling.

SDL represents points in time as nanoseconds since the Unix epoch (SDL_Time).
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Self

from . import errors
from ._dll import bind

__all__ = [
    "DateFormat",
    "DateTime",
    "Day",
    "LocalePreferences",
    "Month",
    "NativeDateTime",
    "Time",
    "TimeFormat",
    "get_current",
    "get_day_of_week",
    "get_day_of_year",
    "get_days_in_month",
    "get_locale_preferences",
]


class DateFormat(IntEnum):
    YYYYMMDD = 0
    DDMMYYYY = 1
    MMDDYYYY = 2


class TimeFormat(IntEnum):
    HR24 = 0
    HR12 = 1


class Day(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class NativeDateTime(ctypes.Structure):
    _fields_ = [
        ("year", ctypes.c_int),
        ("month", ctypes.c_int),
        ("day", ctypes.c_int),
        ("hour", ctypes.c_int),
        ("minute", ctypes.c_int),
        ("second", ctypes.c_int),
        ("nanosecond", ctypes.c_int),
        ("day_of_week", ctypes.c_int),
        ("utc_offset", ctypes.c_int),
    ]


@dataclass(slots=True)
class DateTime:
    """
    A calendar date and time broken down into its components.

    :ivar utc_offset: Seconds east of UTC.
    """

    year: int
    month: Month
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    day_of_week: Day = Day.SUNDAY
    utc_offset: int = 0

    @classmethod
    def from_sdl(cls, value: NativeDateTime) -> Self:
        return cls(
            value.year,
            Month(value.month),
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.nanosecond,
            Day(value.day_of_week),
            value.utc_offset,
        )

    def to_sdl(self) -> NativeDateTime:
        return NativeDateTime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond,
            self.day_of_week,
            self.utc_offset,
        )


_SDL_GetDateTimeLocalePreferences = bind(
    "SDL_GetDateTimeLocalePreferences", [ctypes.POINTER(ctypes.c_int), ctypes.POINTER(ctypes.c_int)], ctypes.c_bool
)
_SDL_GetCurrentTime = bind("SDL_GetCurrentTime", [ctypes.POINTER(ctypes.c_int64)], ctypes.c_bool)
_SDL_TimeToDateTime = bind(
    "SDL_TimeToDateTime", [ctypes.c_int64, ctypes.POINTER(NativeDateTime), ctypes.c_bool], ctypes.c_bool
)
_SDL_DateTimeToTime = bind(
    "SDL_DateTimeToTime", [ctypes.POINTER(NativeDateTime), ctypes.POINTER(ctypes.c_int64)], ctypes.c_bool
)
_SDL_TimeToWindows = bind(
    "SDL_TimeToWindows", [ctypes.c_int64, ctypes.POINTER(ctypes.c_uint32), ctypes.POINTER(ctypes.c_uint32)], None
)
_SDL_TimeFromWindows = bind("SDL_TimeFromWindows", [ctypes.c_uint32, ctypes.c_uint32], ctypes.c_int64)
_SDL_GetDaysInMonth = bind("SDL_GetDaysInMonth", [ctypes.c_int, ctypes.c_int], ctypes.c_int)
_SDL_GetDayOfYear = bind("SDL_GetDayOfYear", [ctypes.c_int, ctypes.c_int, ctypes.c_int], ctypes.c_int)
_SDL_GetDayOfWeek = bind("SDL_GetDayOfWeek", [ctypes.c_int, ctypes.c_int, ctypes.c_int], ctypes.c_int)


class Time(int):
    """
    Nanoseconds since the Unix epoch (SDL_Time).
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Time({int(self)})"

    @classmethod
    def get_current(cls) -> Self:
        value = ctypes.c_int64()
        errors.check_bool(_SDL_GetCurrentTime(ctypes.byref(value)))
        return cls(value.value)

    @classmethod
    def from_date_time(cls, dt: DateTime) -> Self:
        """
        Convert a calendar date to a point in time. The day of the week is ignored.
        """
        value = ctypes.c_int64()
        errors.check_bool(_SDL_DateTimeToTime(ctypes.byref(dt.to_sdl()), ctypes.byref(value)))
        return cls(value.value)

    @classmethod
    def from_windows(cls, low: int, high: int) -> Self:
        """
        Convert a Windows FILETIME (100ns intervals since 1601-01-01) to a point in time.
        """
        return cls(_SDL_TimeFromWindows(low, high))

    def to_date_time(self, local_time: bool = True) -> DateTime:
        """
        :param local_time: Use the local time zone. Otherwise the result is in UTC.
        """
        native = NativeDateTime()
        errors.check_bool(_SDL_TimeToDateTime(self, ctypes.byref(native), local_time))
        return DateTime.from_sdl(native)

    def to_windows(self) -> tuple[int, int]:
        """
        :return: The low and high 32 bits of the Windows FILETIME.
        """
        low, high = ctypes.c_uint32(), ctypes.c_uint32()
        _SDL_TimeToWindows(self, ctypes.byref(low), ctypes.byref(high))
        return low.value, high.value


def get_current() -> Time:
    return Time.get_current()


def get_days_in_month(year: int, month: int) -> int:
    return errors.check(_SDL_GetDaysInMonth(year, month), -1)


def get_day_of_year(year: int, month: int, day: int) -> int:
    """
    :return: The day of the year, starting at 0.
    """
    return errors.check(_SDL_GetDayOfYear(year, month, day), -1)


def get_day_of_week(year: int, month: int, day: int) -> Day:
    return Day(errors.check(_SDL_GetDayOfWeek(year, month, day), -1))


class LocalePreferences(NamedTuple):
    date_format: DateFormat
    time_format: TimeFormat


def get_locale_preferences() -> LocalePreferences:
    """
    Query the date and time formats the user prefers.
    """
    date_format, time_format = ctypes.c_int(), ctypes.c_int()
    errors.check_bool(_SDL_GetDateTimeLocalePreferences(ctypes.byref(date_format), ctypes.byref(time_format)))
    return LocalePreferences(DateFormat(date_format.value), TimeFormat(time_format.value))
