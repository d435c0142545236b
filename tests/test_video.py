# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the video module."""

import ctypes
from collections.abc import Iterator

import pytest

from sdlengine import video
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.init import InitFlags, subsystems
from sdlengine.pixels import PixelFormat
from sdlengine.video import Display, DisplayMode, NativeDisplayMode, Window, WindowFlags


class TestDisplayMode:
    @pytest.mark.skipif(ctypes.sizeof(ctypes.c_void_p) != 8, reason="64-bit layout")
    def test_layout(self) -> None:
        assert ctypes.sizeof(NativeDisplayMode) == 40

    def test_round_trip(self) -> None:
        mode = DisplayMode(Display(3), PixelFormat.XRGB8888, 1920, 1080, 2.0, 60.0, 60000, 1001)
        native = mode.to_sdl()
        assert native.display_id == 3
        assert (native.w, native.h) == (1920, 1080)
        assert DisplayMode.from_sdl(native) == mode

    def test_missing_display(self) -> None:
        native = DisplayMode(None, PixelFormat.XRGB8888, 640, 480).to_sdl()
        assert native.display_id == 0
        assert DisplayMode.from_sdl(native).display is None

    def test_internal_data_is_not_compared(self) -> None:
        a = DisplayMode(None, PixelFormat.XRGB8888, 640, 480, _internal=1)
        b = DisplayMode(None, PixelFormat.XRGB8888, 640, 480)
        assert a == b


def test_display_equality() -> None:
    assert Display(1) == Display(1)
    assert Display(1) != Display(2)
    assert len({Display(1), Display(1)}) == 1


def test_destroyed_window() -> None:
    window = Window(video._WindowP())
    assert repr(window) == "<Window destroyed>"
    window.destroy()


@requires_library
class TestNativeVideo:
    @pytest.fixture(autouse=True)
    def video_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.VIDEO):
            yield

    @pytest.fixture
    def window(self) -> Iterator[Window]:
        with Window.create("Test", 320, 240, WindowFlags.HIDDEN) as window:
            yield window

    def test_driver(self) -> None:
        assert video.get_current_driver() == "dummy"
        assert "dummy" in video.get_drivers()

    def test_primary_display(self) -> None:
        display = Display.get_primary()
        assert display in Display.get_all()
        assert isinstance(display.name, str)
        bounds = display.get_bounds()
        mode = display.get_desktop_mode()
        assert (bounds.x, bounds.y) == (0, 0)
        assert (mode.width, mode.height) == (bounds.w, bounds.h)
        assert mode.display == display

    def test_window_title(self, window: Window) -> None:
        assert window.title == "Test"
        window.title = "Renamed"
        assert window.title == "Renamed"

    def test_window_size(self, window: Window) -> None:
        assert window.get_size() == (320, 240)
        assert window.flags & WindowFlags.HIDDEN

    def test_window_lookup(self, window: Window) -> None:
        assert Window.from_id(window.id) == window
        assert window in Window.get_all()
        assert window.display == Display.get_primary()

    def test_destroy_twice(self) -> None:
        window = Window.create("Test", 32, 32, WindowFlags.HIDDEN)
        window.destroy()
        assert not window.pointer
        window.destroy()
