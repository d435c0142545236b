# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Mouse state, cursors and pointer confinement.

All functions should be called on the main thread while the video
subsystem is initialized. Cursors are handles:

    >>> with Cursor.create_system(SystemCursor.POINTER) as cursor:
    ...     set_cursor(cursor)
"""

from __future__ import annotations

import ctypes
from collections.abc import Buffer
from contextlib import AbstractContextManager
from enum import IntEnum, IntFlag
from types import TracebackType
from typing import Any, NamedTuple, Self

from . import errors, stdinc
from ._dll import bind
from .rect import Rect
from .surface import Surface, _SurfaceP
from .video import Window, _WindowP

__all__ = [
    "PEN_MOUSE_ID",
    "TOUCH_MOUSE_ID",
    "Cursor",
    "MouseButton",
    "MouseButtonFlags",
    "MouseState",
    "MouseWheelDirection",
    "SystemCursor",
    "capture",
    "cursor_visible",
    "get_cursor",
    "get_focus",
    "get_global_state",
    "get_mice",
    "get_name_for_id",
    "get_relative_state",
    "get_state",
    "get_window_grab",
    "get_window_rect",
    "get_window_relative_mode",
    "has_mouse",
    "hide_cursor",
    "set_cursor",
    "set_window_grab",
    "set_window_rect",
    "set_window_relative_mode",
    "show_cursor",
    "warp_global",
    "warp_in_window",
]


#: The mouse id of events synthesized from pen input.
PEN_MOUSE_ID = 0xFFFFFFFE
#: The mouse id of events synthesized from touch input.
TOUCH_MOUSE_ID = 0xFFFFFFFF


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


class MouseButtonFlags(IntFlag):
    NONE = 0
    LEFT = 1 << (MouseButton.LEFT - 1)
    MIDDLE = 1 << (MouseButton.MIDDLE - 1)
    RIGHT = 1 << (MouseButton.RIGHT - 1)
    X1 = 1 << (MouseButton.X1 - 1)
    X2 = 1 << (MouseButton.X2 - 1)

    @classmethod
    def for_button(cls, button: MouseButton) -> MouseButtonFlags:
        return cls(1 << (button - 1))


class MouseWheelDirection(IntEnum):
    NORMAL = 0
    FLIPPED = 1


class SystemCursor(IntEnum):
    DEFAULT = 0
    TEXT = 1
    WAIT = 2
    CROSSHAIR = 3
    PROGRESS = 4
    NWSE_RESIZE = 5
    NESW_RESIZE = 6
    EW_RESIZE = 7
    NS_RESIZE = 8
    MOVE = 9
    NOT_ALLOWED = 10
    POINTER = 11
    NW_RESIZE = 12
    N_RESIZE = 13
    NE_RESIZE = 14
    E_RESIZE = 15
    SE_RESIZE = 16
    S_RESIZE = 17
    SW_RESIZE = 18
    W_RESIZE = 19


class MouseState(NamedTuple):
    buttons: MouseButtonFlags
    x: float
    y: float


class _Cursor(ctypes.Structure):
    pass


_CursorP = ctypes.POINTER(_Cursor)
_IntP = ctypes.POINTER(ctypes.c_int)
_FloatP = ctypes.POINTER(ctypes.c_float)

_SDL_HasMouse = bind("SDL_HasMouse", [], ctypes.c_bool)
_SDL_GetMice = bind("SDL_GetMice", [_IntP], ctypes.POINTER(ctypes.c_uint32))
_SDL_GetMouseNameForID = bind("SDL_GetMouseNameForID", [ctypes.c_uint32], ctypes.c_char_p)
_SDL_GetMouseFocus = bind("SDL_GetMouseFocus", [], _WindowP)
_SDL_GetMouseState = bind("SDL_GetMouseState", [_FloatP, _FloatP], ctypes.c_uint32)
_SDL_GetGlobalMouseState = bind("SDL_GetGlobalMouseState", [_FloatP, _FloatP], ctypes.c_uint32)
_SDL_GetRelativeMouseState = bind("SDL_GetRelativeMouseState", [_FloatP, _FloatP], ctypes.c_uint32)
_SDL_WarpMouseInWindow = bind("SDL_WarpMouseInWindow", [_WindowP, ctypes.c_float, ctypes.c_float], None)
_SDL_WarpMouseGlobal = bind("SDL_WarpMouseGlobal", [ctypes.c_float, ctypes.c_float], ctypes.c_bool)
_SDL_SetWindowRelativeMouseMode = bind("SDL_SetWindowRelativeMouseMode", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_GetWindowRelativeMouseMode = bind("SDL_GetWindowRelativeMouseMode", [_WindowP], ctypes.c_bool)
_SDL_CaptureMouse = bind("SDL_CaptureMouse", [ctypes.c_bool], ctypes.c_bool)
_SDL_CreateCursor = bind(
    "SDL_CreateCursor",
    [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_int, ctypes.c_int, ctypes.c_int, ctypes.c_int],
    _CursorP,
)
_SDL_CreateColorCursor = bind("SDL_CreateColorCursor", [_SurfaceP, ctypes.c_int, ctypes.c_int], _CursorP)
_SDL_CreateSystemCursor = bind("SDL_CreateSystemCursor", [ctypes.c_int], _CursorP)
_SDL_SetCursor = bind("SDL_SetCursor", [_CursorP], ctypes.c_bool)
_SDL_GetCursor = bind("SDL_GetCursor", [], _CursorP)
_SDL_GetDefaultCursor = bind("SDL_GetDefaultCursor", [], _CursorP)
_SDL_DestroyCursor = bind("SDL_DestroyCursor", [_CursorP], None)
_SDL_ShowCursor = bind("SDL_ShowCursor", [], ctypes.c_bool)
_SDL_HideCursor = bind("SDL_HideCursor", [], ctypes.c_bool)
_SDL_CursorVisible = bind("SDL_CursorVisible", [], ctypes.c_bool)


class Cursor(AbstractContextManager["Cursor"]):
    """
    A mouse cursor (SDL_Cursor).

    Cursors returned by get_cursor() and get_default() belong to SDL.
    Destroying such a handle only invalidates the handle.
    """

    __slots__ = ("_owned", "pointer")

    def __init__(self, pointer: ctypes._Pointer[_Cursor], owned: bool = True) -> None:
        self.pointer = pointer
        self._owned = owned

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._address == other._address

    def __hash__(self) -> int:
        return hash(self._address)

    def __repr__(self) -> str:
        if not self.pointer:
            return "<Cursor destroyed>"
        return f"<Cursor {self._address:#x}>"

    @property
    def _address(self) -> int | None:
        return ctypes.cast(self.pointer, ctypes.c_void_p).value

    @classmethod
    def create(cls, data: Buffer, mask: Buffer, width: int, height: int, hot_x: int, hot_y: int) -> Self:
        """
        Create a monochrome cursor.

        Each bit of data and mask describes one pixel, most significant bit first:

        ====  ====  =====================
        data  mask  result
        ====  ====  =====================
        0     1     white
        1     1     black
        0     0     transparent
        1     0     inverted if possible
        ====  ====  =====================

        :param width: The width in pixels. Must be a multiple of 8.
        """
        if width <= 0 or width % 8:
            raise ValueError("The cursor width must be a positive multiple of 8")
        if height <= 0:
            raise ValueError("The cursor height must be positive")

        size = width // 8 * height
        raw_data, raw_mask = bytes(data), bytes(mask)
        if len(raw_data) < size or len(raw_mask) < size:
            raise ValueError(f"The cursor data and mask need {size} bytes each")

        return cls(errors.check_null(_SDL_CreateCursor(raw_data, raw_mask, width, height, hot_x, hot_y)))

    @classmethod
    def create_color(cls, surface: Surface, hot_x: int, hot_y: int) -> Self:
        """
        Create a color cursor from a surface. SDL copies the pixels.
        """
        return cls(errors.check_null(_SDL_CreateColorCursor(surface.pointer, hot_x, hot_y)))

    @classmethod
    def create_system(cls, cursor: SystemCursor) -> Self:
        return cls(errors.check_null(_SDL_CreateSystemCursor(cursor)))

    @classmethod
    def get_default(cls) -> Self:
        return cls(errors.check_null(_SDL_GetDefaultCursor()), owned=False)

    def destroy(self) -> None:
        """
        Free the cursor. Destroying a destroyed cursor does nothing.
        """
        if not self.pointer:
            return

        pointer, self.pointer = self.pointer, _CursorP()
        if self._owned:
            _SDL_DestroyCursor(pointer)


def has_mouse() -> bool:
    return bool(_SDL_HasMouse())


def get_mice() -> list[int]:
    """
    :return: The instance ids of the currently connected mice.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetMice(ctypes.byref(count)))
    return stdinc.take_array(array, count.value)


def get_name_for_id(mouse_id: int) -> str | None:
    """
    :return: The name of the mouse, or None if it has none.
    """
    name = errors.check_null(_SDL_GetMouseNameForID(mouse_id))
    return name.decode("utf-8") or None


def get_focus() -> Window | None:
    pointer = _SDL_GetMouseFocus()
    return Window(pointer) if pointer else None


def _query(func: Any) -> MouseState:
    x, y = ctypes.c_float(), ctypes.c_float()
    buttons = func(ctypes.byref(x), ctypes.byref(y))
    return MouseState(MouseButtonFlags(buttons), x.value, y.value)


def get_state() -> MouseState:
    """
    :return: The cached button state and the position relative to the focused window.
    """
    return _query(_SDL_GetMouseState)


def get_global_state() -> MouseState:
    """
    Query the platform for the button state and the position in desktop coordinates.

    This is slower than get_state() and works even without a focused window.
    """
    return _query(_SDL_GetGlobalMouseState)


def get_relative_state() -> MouseState:
    """
    :return: The button state and the motion accumulated since the last call.
    """
    return _query(_SDL_GetRelativeMouseState)


def warp_in_window(window: Window | None, x: float, y: float) -> None:
    """
    Move the cursor within a window, or the focused window if None.

    This generates a mouse motion event, unless relative mode is enabled.
    """
    _SDL_WarpMouseInWindow(None if window is None else window.pointer, x, y)


def warp_global(x: float, y: float) -> None:
    errors.check_bool(_SDL_WarpMouseGlobal(x, y))


def get_window_grab(window: Window) -> bool:
    return window.mouse_grab


def set_window_grab(window: Window, grabbed: bool) -> None:
    window.mouse_grab = grabbed


def get_window_rect(window: Window) -> Rect | None:
    return window.get_mouse_rect()


def set_window_rect(window: Window, rect: Rect | None) -> None:
    """
    Confine the cursor to an area of the window. None removes the confinement.
    """
    window.set_mouse_rect(rect)


def get_window_relative_mode(window: Window) -> bool:
    return bool(_SDL_GetWindowRelativeMouseMode(window.pointer))


def set_window_relative_mode(window: Window, enabled: bool) -> None:
    """
    In relative mode the cursor is hidden and confined to the window,
    and motion events keep reporting relative motion at the window edges.
    """
    errors.check_bool(_SDL_SetWindowRelativeMouseMode(window.pointer, enabled))


def capture(enabled: bool) -> None:
    """
    Track the mouse outside the focused window, for example while dragging.
    """
    errors.check_bool(_SDL_CaptureMouse(enabled))


def set_cursor(cursor: Cursor | None) -> None:
    """
    Make a cursor active. None redraws the current cursor.
    """
    errors.check_bool(_SDL_SetCursor(None if cursor is None else cursor.pointer))


def get_cursor() -> Cursor | None:
    """
    :return: The active cursor, which belongs to SDL.
    """
    pointer = _SDL_GetCursor()
    return Cursor(pointer, owned=False) if pointer else None


def show_cursor() -> None:
    errors.check_bool(_SDL_ShowCursor())


def hide_cursor() -> None:
    errors.check_bool(_SDL_HideCursor())


def cursor_visible() -> bool:
    return bool(_SDL_CursorVisible())
