# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the time module."""

from sdlengine import time
from sdlengine._testutils import requires_library
from sdlengine.time import DateTime, Day, Month, Time


class TestDateTime:
    def test_native_round_trip(self) -> None:
        dt = DateTime(2024, Month.FEBRUARY, 29, 13, 37, 5, 123, Day.THURSDAY, 3600)
        native = dt.to_sdl()
        assert (native.year, native.month, native.day) == (2024, 2, 29)
        assert native.utc_offset == 3600
        assert DateTime.from_sdl(native) == dt

    def test_defaults(self) -> None:
        dt = DateTime(2000, Month.JANUARY, 1)
        assert (dt.hour, dt.minute, dt.second, dt.nanosecond) == (0, 0, 0, 0)
        assert dt.utc_offset == 0

    def test_time_is_an_int(self) -> None:
        assert Time(5) + 1 == 6
        assert repr(Time(5)) == "Time(5)"


@requires_library
class TestNativeTime:
    def test_epoch(self) -> None:
        dt = Time(0).to_date_time(local_time=False)
        assert (dt.year, dt.month, dt.day) == (1970, Month.JANUARY, 1)
        assert dt.day_of_week == Day.THURSDAY
        assert dt.utc_offset == 0

    def test_date_time_round_trip(self) -> None:
        dt = DateTime(2024, Month.MARCH, 1, 12, 30, 15, 500)
        value = Time.from_date_time(dt)
        back = value.to_date_time(local_time=False)
        assert (back.year, back.month, back.day) == (2024, Month.MARCH, 1)
        assert (back.hour, back.minute, back.second, back.nanosecond) == (12, 30, 15, 500)

    def test_windows_round_trip(self) -> None:
        value = Time(1_700_000_000 * 1_000_000_000)
        assert Time.from_windows(*value.to_windows()) == value

    def test_current_time_is_recent(self) -> None:
        assert time.get_current().to_date_time(local_time=False).year >= 2024

    def test_calendar(self) -> None:
        assert time.get_days_in_month(2024, Month.FEBRUARY) == 29
        assert time.get_days_in_month(2023, Month.FEBRUARY) == 28
        assert time.get_day_of_year(2024, Month.MARCH, 1) == 60
        assert time.get_day_of_week(2024, Month.JANUARY, 1) == Day.MONDAY
