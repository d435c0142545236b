# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the mouse module."""

from collections.abc import Iterator

import pytest

from sdlengine import mouse
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.init import InitFlags, subsystems
from sdlengine.mouse import Cursor, MouseButton, MouseButtonFlags, MouseState
from sdlengine.rect import Rect
from sdlengine.video import Window, WindowFlags

ARROW = bytes([0x80, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC, 0xFE, 0xFF])


def test_button_flags() -> None:
    assert MouseButtonFlags.for_button(MouseButton.LEFT) is MouseButtonFlags.LEFT
    assert MouseButtonFlags.for_button(MouseButton.X2) == 16
    assert MouseButtonFlags(5) == MouseButtonFlags.LEFT | MouseButtonFlags.RIGHT


def test_destroyed_cursor() -> None:
    cursor = Cursor(mouse._CursorP())
    assert repr(cursor) == "<Cursor destroyed>"
    cursor.destroy()


@pytest.mark.parametrize(("width", "height", "size"), [(7, 8, 8), (0, 8, 0), (8, 0, 0), (8, 8, 7)])
def test_create_cursor_rejects_bad_shapes(width: int, height: int, size: int) -> None:
    with pytest.raises(ValueError):
        Cursor.create(bytes(size), bytes(size), width, height, 0, 0)


@requires_library
class TestNativeMouse:
    @pytest.fixture(autouse=True)
    def video_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.VIDEO):
            yield

    @pytest.fixture
    def window(self) -> Iterator[Window]:
        with Window.create("Test", 64, 64, WindowFlags.HIDDEN) as window:
            yield window

    def test_mice(self) -> None:
        for mouse_id in mouse.get_mice():
            name = mouse.get_name_for_id(mouse_id)
            assert name is None or isinstance(name, str)

    def test_state(self) -> None:
        for state in (mouse.get_state(), mouse.get_relative_state()):
            assert isinstance(state, MouseState)
            assert isinstance(state.buttons, MouseButtonFlags)

    def test_cursor_visibility(self) -> None:
        mouse.hide_cursor()
        try:
            assert not mouse.cursor_visible()
        finally:
            mouse.show_cursor()
        assert mouse.cursor_visible()

    def test_monochrome_cursor(self) -> None:
        with Cursor.create(ARROW, ARROW, 8, 8, 0, 0) as cursor:
            mouse.set_cursor(cursor)
            assert mouse.get_cursor() == cursor
        assert not cursor.pointer

    def test_borrowed_cursor_outlives_handle(self) -> None:
        with Cursor.create(ARROW, ARROW, 8, 8, 0, 0) as cursor:
            mouse.set_cursor(cursor)
            current = mouse.get_cursor()
            assert current is not None
            current.destroy()
            assert mouse.get_cursor() == cursor

    def test_window_confinement(self, window: Window) -> None:
        mouse.set_window_rect(window, Rect(0, 0, 16, 16))
        assert mouse.get_window_rect(window) == Rect(0, 0, 16, 16)
        mouse.set_window_rect(window, None)
        assert mouse.get_window_rect(window) is None

    def test_window_grab(self, window: Window) -> None:
        mouse.set_window_grab(window, False)
        assert not mouse.get_window_grab(window)

    def test_relative_mode_starts_disabled(self, window: Window) -> None:
        assert not mouse.get_window_relative_mode(window)

    def test_warp(self, window: Window) -> None:
        mouse.warp_in_window(window, 10, 20)
        mouse.warp_in_window(None, 0, 0)
