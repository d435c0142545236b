# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the timer module."""

import threading

from sdlengine import timer
from sdlengine._testutils import requires_library
from sdlengine.timer import Timer


class TestConversions:
    def test_seconds(self) -> None:
        assert timer.seconds_to_ns(2) == 2_000_000_000
        assert timer.ns_to_seconds(2_500_000_000) == 2

    def test_milliseconds(self) -> None:
        assert timer.ms_to_ns(3) == 3_000_000
        assert timer.ns_to_ms(3_999_999) == 3

    def test_microseconds(self) -> None:
        assert timer.us_to_ns(7) == 7_000
        assert timer.ns_to_us(7_999) == 7


class TestFire:
    def test_unknown_handle(self) -> None:
        assert timer._fire(None, 10) == 0
        assert timer._fire(123456789, 10) == 0

    def test_repeats_while_positive(self) -> None:
        t = Timer(lambda t, interval: interval * 2)
        handle = timer._timers.add(t)
        try:
            assert timer._fire(handle, 10) == 20
            assert handle in timer._timers
        finally:
            timer._timers.pop(handle)

    def test_stops_on_zero(self) -> None:
        t = Timer(lambda t, interval: 0)
        t._handle = timer._timers.add(t)
        assert t.active
        assert timer._fire(t._handle, 10) == 0
        assert not t.active

    def test_stops_on_error(self) -> None:
        def _fail(t: Timer, interval: int) -> int:
            raise RuntimeError

        t = Timer(_fail)
        t._handle = timer._timers.add(t)
        assert timer._fire(t._handle, 10) == 0
        assert not t.active


@requires_library
class TestNativeTimer:
    def test_ticks_increase(self) -> None:
        before = timer.get_ticks_ns()
        timer.delay_ns(1_000_000)
        assert timer.get_ticks_ns() > before

    def test_performance_counter(self) -> None:
        assert timer.get_performance_frequency() > 0
        assert timer.get_performance_counter() > 0

    def test_one_shot_timer(self) -> None:
        fired = threading.Event()

        def _callback(t: Timer, interval: int) -> int:
            fired.set()
            return 0

        t = Timer.add_milliseconds(1, _callback)
        assert fired.wait(5)
        timer.delay(10)
        assert not t.active

    def test_repeating_timer(self) -> None:
        calls: list[int] = []
        done = threading.Event()

        def _callback(t: Timer, interval: int) -> int:
            calls.append(interval)
            if len(calls) == 3:
                done.set()
                return 0
            return interval

        Timer.add_nanoseconds(1_000_000, _callback)
        assert done.wait(5)
        assert calls == [1_000_000] * 3

    def test_remove(self) -> None:
        t = Timer.add_milliseconds(60_000, lambda t, interval: interval)
        assert t.active
        t.remove()
        assert not t.active
