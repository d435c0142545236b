# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Displays and windows.

A window is created with Window.create() and destroyed with Window.destroy()
or by leaving a with-block:

    >>> with Window.create("Hello", 640, 480, WindowFlags.RESIZABLE) as window:
    ...     ...

The video subsystem must be initialized and most functions must be called
from the main thread.
"""

from __future__ import annotations

import ctypes
from collections.abc import Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from types import TracebackType
from typing import NamedTuple, Self

from . import errors, properties, stdinc
from ._dll import Function, bind
from .pixels import PixelFormat
from .rect import Point, Rect
from .surface import Surface, _SurfaceP

__all__ = [
    "WINDOWPOS_CENTERED",
    "WINDOWPOS_UNDEFINED",
    "BordersSize",
    "Display",
    "DisplayMode",
    "DisplayOrientation",
    "FlashOperation",
    "NativeDisplayMode",
    "SystemTheme",
    "Window",
    "WindowCreateProperties",
    "WindowFlags",
    "disable_screen_saver",
    "enable_screen_saver",
    "get_current_driver",
    "get_drivers",
    "get_system_theme",
    "screen_saver_enabled",
    "windowpos_centered_display",
    "windowpos_undefined_display",
]


_WINDOWPOS_UNDEFINED_MASK = 0x1FFF0000
_WINDOWPOS_CENTERED_MASK = 0x2FFF0000


def windowpos_undefined_display(display: int) -> int:
    return _WINDOWPOS_UNDEFINED_MASK | display


def windowpos_centered_display(display: int) -> int:
    return _WINDOWPOS_CENTERED_MASK | display


#: Let the window manager place the window.
WINDOWPOS_UNDEFINED = windowpos_undefined_display(0)
#: Center the window on the primary display.
WINDOWPOS_CENTERED = windowpos_centered_display(0)


class SystemTheme(IntEnum):
    UNKNOWN = 0
    LIGHT = 1
    DARK = 2


class DisplayOrientation(IntEnum):
    UNKNOWN = 0
    LANDSCAPE = 1
    LANDSCAPE_FLIPPED = 2
    PORTRAIT = 3
    PORTRAIT_FLIPPED = 4


class WindowFlags(IntFlag):
    NONE = 0
    FULLSCREEN = 0x0000000000000001
    OPENGL = 0x0000000000000002
    OCCLUDED = 0x0000000000000004
    HIDDEN = 0x0000000000000008
    BORDERLESS = 0x0000000000000010
    RESIZABLE = 0x0000000000000020
    MINIMIZED = 0x0000000000000040
    MAXIMIZED = 0x0000000000000080
    MOUSE_GRABBED = 0x0000000000000100
    INPUT_FOCUS = 0x0000000000000200
    MOUSE_FOCUS = 0x0000000000000400
    EXTERNAL = 0x0000000000000800
    MODAL = 0x0000000000001000
    HIGH_PIXEL_DENSITY = 0x0000000000002000
    MOUSE_CAPTURE = 0x0000000000004000
    MOUSE_RELATIVE_MODE = 0x0000000000008000
    ALWAYS_ON_TOP = 0x0000000000010000
    UTILITY = 0x0000000000020000
    TOOLTIP = 0x0000000000040000
    POPUP_MENU = 0x0000000000080000
    KEYBOARD_GRABBED = 0x0000000000100000
    VULKAN = 0x0000000010000000
    METAL = 0x0000000020000000
    TRANSPARENT = 0x0000000040000000
    NOT_FOCUSABLE = 0x0000000080000000


class FlashOperation(IntEnum):
    CANCEL = 0
    BRIEFLY = 1
    UNTIL_FOCUSED = 2


class NativeDisplayMode(ctypes.Structure):
    _fields_ = [
        ("display_id", ctypes.c_uint32),
        ("format", ctypes.c_uint32),
        ("w", ctypes.c_int),
        ("h", ctypes.c_int),
        ("pixel_density", ctypes.c_float),
        ("refresh_rate", ctypes.c_float),
        ("refresh_rate_numerator", ctypes.c_int),
        ("refresh_rate_denominator", ctypes.c_int),
        ("internal", ctypes.c_void_p),
    ]


@dataclass(frozen=True, slots=True)
class DisplayMode:
    """
    The structure that defines a display mode.
    """

    display: Display | None
    format: PixelFormat
    width: int
    height: int
    #: Scale converting size to pixels (e.g. a 1920x1080 mode with 2.0 scale would have 3840x2160 pixels).
    pixel_density: float = 1.0
    #: Refresh rate (or 0.0 for unspecified).
    refresh_rate: float = 0.0
    refresh_rate_numerator: int = 0
    refresh_rate_denominator: int = 0
    # Opaque driver data, required to switch to this exact mode.
    _internal: int | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_sdl(cls, mode: NativeDisplayMode) -> Self:
        return cls(
            Display(mode.display_id) if mode.display_id else None,
            PixelFormat(mode.format),
            mode.w,
            mode.h,
            mode.pixel_density,
            mode.refresh_rate,
            mode.refresh_rate_numerator,
            mode.refresh_rate_denominator,
            mode.internal,
        )

    def to_sdl(self) -> NativeDisplayMode:
        return NativeDisplayMode(
            0 if self.display is None else self.display.value,
            self.format,
            self.width,
            self.height,
            self.pixel_density,
            self.refresh_rate,
            self.refresh_rate_numerator,
            self.refresh_rate_denominator,
            self._internal,
        )


class _Window(ctypes.Structure):
    pass


_WindowP = ctypes.POINTER(_Window)
_ModeP = ctypes.POINTER(NativeDisplayMode)
_IntP = ctypes.POINTER(ctypes.c_int)
_FloatP = ctypes.POINTER(ctypes.c_float)

_SDL_GetNumVideoDrivers = bind("SDL_GetNumVideoDrivers", [], ctypes.c_int)
_SDL_GetVideoDriver = bind("SDL_GetVideoDriver", [ctypes.c_int], ctypes.c_char_p)
_SDL_GetCurrentVideoDriver = bind("SDL_GetCurrentVideoDriver", [], ctypes.c_char_p)
_SDL_GetSystemTheme = bind("SDL_GetSystemTheme", [], ctypes.c_int)
_SDL_GetDisplays = bind("SDL_GetDisplays", [_IntP], ctypes.POINTER(ctypes.c_uint32))
_SDL_GetPrimaryDisplay = bind("SDL_GetPrimaryDisplay", [], ctypes.c_uint32)
_SDL_GetDisplayProperties = bind("SDL_GetDisplayProperties", [ctypes.c_uint32], ctypes.c_uint32)
_SDL_GetDisplayName = bind("SDL_GetDisplayName", [ctypes.c_uint32], ctypes.c_char_p)
_SDL_GetDisplayBounds = bind("SDL_GetDisplayBounds", [ctypes.c_uint32, ctypes.POINTER(Rect)], ctypes.c_bool)
_SDL_GetDisplayUsableBounds = bind(
    "SDL_GetDisplayUsableBounds", [ctypes.c_uint32, ctypes.POINTER(Rect)], ctypes.c_bool
)
_SDL_GetNaturalDisplayOrientation = bind("SDL_GetNaturalDisplayOrientation", [ctypes.c_uint32], ctypes.c_int)
_SDL_GetCurrentDisplayOrientation = bind("SDL_GetCurrentDisplayOrientation", [ctypes.c_uint32], ctypes.c_int)
_SDL_GetDisplayContentScale = bind("SDL_GetDisplayContentScale", [ctypes.c_uint32], ctypes.c_float)
_SDL_GetFullscreenDisplayModes = bind(
    "SDL_GetFullscreenDisplayModes", [ctypes.c_uint32, _IntP], ctypes.POINTER(_ModeP)
)
_SDL_GetClosestFullscreenDisplayMode = bind(
    "SDL_GetClosestFullscreenDisplayMode",
    [ctypes.c_uint32, ctypes.c_int, ctypes.c_int, ctypes.c_float, ctypes.c_bool, _ModeP],
    ctypes.c_bool,
)
_SDL_GetDesktopDisplayMode = bind("SDL_GetDesktopDisplayMode", [ctypes.c_uint32], _ModeP)
_SDL_GetCurrentDisplayMode = bind("SDL_GetCurrentDisplayMode", [ctypes.c_uint32], _ModeP)
_SDL_GetDisplayForPoint = bind("SDL_GetDisplayForPoint", [ctypes.POINTER(Point)], ctypes.c_uint32)
_SDL_GetDisplayForRect = bind("SDL_GetDisplayForRect", [ctypes.POINTER(Rect)], ctypes.c_uint32)
_SDL_GetDisplayForWindow = bind("SDL_GetDisplayForWindow", [_WindowP], ctypes.c_uint32)
_SDL_GetWindowPixelDensity = bind("SDL_GetWindowPixelDensity", [_WindowP], ctypes.c_float)
_SDL_GetWindowDisplayScale = bind("SDL_GetWindowDisplayScale", [_WindowP], ctypes.c_float)
_SDL_SetWindowFullscreenMode = bind("SDL_SetWindowFullscreenMode", [_WindowP, _ModeP], ctypes.c_bool)
_SDL_GetWindowFullscreenMode = bind("SDL_GetWindowFullscreenMode", [_WindowP], _ModeP)
_SDL_GetWindowPixelFormat = bind("SDL_GetWindowPixelFormat", [_WindowP], ctypes.c_uint32)
_SDL_GetWindows = bind("SDL_GetWindows", [_IntP], ctypes.POINTER(_WindowP))
_SDL_CreateWindow = bind("SDL_CreateWindow", [ctypes.c_char_p, ctypes.c_int, ctypes.c_int, ctypes.c_uint64], _WindowP)
_SDL_CreatePopupWindow = bind(
    "SDL_CreatePopupWindow",
    [_WindowP, ctypes.c_int, ctypes.c_int, ctypes.c_int, ctypes.c_int, ctypes.c_uint64],
    _WindowP,
)
_SDL_CreateWindowWithProperties = bind("SDL_CreateWindowWithProperties", [ctypes.c_uint32], _WindowP)
_SDL_GetWindowID = bind("SDL_GetWindowID", [_WindowP], ctypes.c_uint32)
_SDL_GetWindowFromID = bind("SDL_GetWindowFromID", [ctypes.c_uint32], _WindowP)
_SDL_GetWindowParent = bind("SDL_GetWindowParent", [_WindowP], _WindowP)
_SDL_GetWindowProperties = bind("SDL_GetWindowProperties", [_WindowP], ctypes.c_uint32)
_SDL_GetWindowFlags = bind("SDL_GetWindowFlags", [_WindowP], ctypes.c_uint64)
_SDL_SetWindowTitle = bind("SDL_SetWindowTitle", [_WindowP, ctypes.c_char_p], ctypes.c_bool)
_SDL_GetWindowTitle = bind("SDL_GetWindowTitle", [_WindowP], ctypes.c_char_p)
_SDL_SetWindowIcon = bind("SDL_SetWindowIcon", [_WindowP, _SurfaceP], ctypes.c_bool)
_SDL_SetWindowPosition = bind("SDL_SetWindowPosition", [_WindowP, ctypes.c_int, ctypes.c_int], ctypes.c_bool)
_SDL_GetWindowPosition = bind("SDL_GetWindowPosition", [_WindowP, _IntP, _IntP], ctypes.c_bool)
_SDL_SetWindowSize = bind("SDL_SetWindowSize", [_WindowP, ctypes.c_int, ctypes.c_int], ctypes.c_bool)
_SDL_GetWindowSize = bind("SDL_GetWindowSize", [_WindowP, _IntP, _IntP], ctypes.c_bool)
_SDL_GetWindowSafeArea = bind("SDL_GetWindowSafeArea", [_WindowP, ctypes.POINTER(Rect)], ctypes.c_bool)
_SDL_SetWindowAspectRatio = bind(
    "SDL_SetWindowAspectRatio", [_WindowP, ctypes.c_float, ctypes.c_float], ctypes.c_bool
)
_SDL_GetWindowAspectRatio = bind("SDL_GetWindowAspectRatio", [_WindowP, _FloatP, _FloatP], ctypes.c_bool)
_SDL_GetWindowBordersSize = bind("SDL_GetWindowBordersSize", [_WindowP, _IntP, _IntP, _IntP, _IntP], ctypes.c_bool)
_SDL_GetWindowSizeInPixels = bind("SDL_GetWindowSizeInPixels", [_WindowP, _IntP, _IntP], ctypes.c_bool)
_SDL_SetWindowMinimumSize = bind("SDL_SetWindowMinimumSize", [_WindowP, ctypes.c_int, ctypes.c_int], ctypes.c_bool)
_SDL_GetWindowMinimumSize = bind("SDL_GetWindowMinimumSize", [_WindowP, _IntP, _IntP], ctypes.c_bool)
_SDL_SetWindowMaximumSize = bind("SDL_SetWindowMaximumSize", [_WindowP, ctypes.c_int, ctypes.c_int], ctypes.c_bool)
_SDL_GetWindowMaximumSize = bind("SDL_GetWindowMaximumSize", [_WindowP, _IntP, _IntP], ctypes.c_bool)
_SDL_SetWindowBordered = bind("SDL_SetWindowBordered", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_SetWindowResizable = bind("SDL_SetWindowResizable", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_SetWindowAlwaysOnTop = bind("SDL_SetWindowAlwaysOnTop", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_ShowWindow = bind("SDL_ShowWindow", [_WindowP], ctypes.c_bool)
_SDL_HideWindow = bind("SDL_HideWindow", [_WindowP], ctypes.c_bool)
_SDL_RaiseWindow = bind("SDL_RaiseWindow", [_WindowP], ctypes.c_bool)
_SDL_MaximizeWindow = bind("SDL_MaximizeWindow", [_WindowP], ctypes.c_bool)
_SDL_MinimizeWindow = bind("SDL_MinimizeWindow", [_WindowP], ctypes.c_bool)
_SDL_RestoreWindow = bind("SDL_RestoreWindow", [_WindowP], ctypes.c_bool)
_SDL_SetWindowFullscreen = bind("SDL_SetWindowFullscreen", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_SyncWindow = bind("SDL_SyncWindow", [_WindowP], ctypes.c_bool)
_SDL_WindowHasSurface = bind("SDL_WindowHasSurface", [_WindowP], ctypes.c_bool)
_SDL_GetWindowSurface = bind("SDL_GetWindowSurface", [_WindowP], _SurfaceP)
_SDL_SetWindowSurfaceVSync = bind("SDL_SetWindowSurfaceVSync", [_WindowP, ctypes.c_int], ctypes.c_bool)
_SDL_GetWindowSurfaceVSync = bind("SDL_GetWindowSurfaceVSync", [_WindowP, _IntP], ctypes.c_bool)
_SDL_UpdateWindowSurface = bind("SDL_UpdateWindowSurface", [_WindowP], ctypes.c_bool)
_SDL_UpdateWindowSurfaceRects = bind(
    "SDL_UpdateWindowSurfaceRects", [_WindowP, ctypes.POINTER(Rect), ctypes.c_int], ctypes.c_bool
)
_SDL_DestroyWindowSurface = bind("SDL_DestroyWindowSurface", [_WindowP], ctypes.c_bool)
_SDL_SetWindowKeyboardGrab = bind("SDL_SetWindowKeyboardGrab", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_SetWindowMouseGrab = bind("SDL_SetWindowMouseGrab", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_GetWindowKeyboardGrab = bind("SDL_GetWindowKeyboardGrab", [_WindowP], ctypes.c_bool)
_SDL_GetWindowMouseGrab = bind("SDL_GetWindowMouseGrab", [_WindowP], ctypes.c_bool)
_SDL_GetGrabbedWindow = bind("SDL_GetGrabbedWindow", [], _WindowP)
_SDL_SetWindowMouseRect = bind("SDL_SetWindowMouseRect", [_WindowP, ctypes.POINTER(Rect)], ctypes.c_bool)
_SDL_GetWindowMouseRect = bind("SDL_GetWindowMouseRect", [_WindowP], ctypes.POINTER(Rect))
_SDL_SetWindowOpacity = bind("SDL_SetWindowOpacity", [_WindowP, ctypes.c_float], ctypes.c_bool)
_SDL_GetWindowOpacity = bind("SDL_GetWindowOpacity", [_WindowP], ctypes.c_float)
_SDL_SetWindowParent = bind("SDL_SetWindowParent", [_WindowP, _WindowP], ctypes.c_bool)
_SDL_SetWindowModal = bind("SDL_SetWindowModal", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_SetWindowFocusable = bind("SDL_SetWindowFocusable", [_WindowP, ctypes.c_bool], ctypes.c_bool)
_SDL_ShowWindowSystemMenu = bind("SDL_ShowWindowSystemMenu", [_WindowP, ctypes.c_int, ctypes.c_int], ctypes.c_bool)
_SDL_FlashWindow = bind("SDL_FlashWindow", [_WindowP, ctypes.c_int], ctypes.c_bool)
_SDL_DestroyWindow = bind("SDL_DestroyWindow", [_WindowP], None)
_SDL_ScreenSaverEnabled = bind("SDL_ScreenSaverEnabled", [], ctypes.c_bool)
_SDL_EnableScreenSaver = bind("SDL_EnableScreenSaver", [], ctypes.c_bool)
_SDL_DisableScreenSaver = bind("SDL_DisableScreenSaver", [], ctypes.c_bool)


def get_drivers() -> list[str]:
    """
    :return: The names of the video drivers built into SDL.
    """
    return [_SDL_GetVideoDriver(i).decode("utf-8") for i in range(_SDL_GetNumVideoDrivers())]


def get_current_driver() -> str | None:
    raw = _SDL_GetCurrentVideoDriver()
    return None if raw is None else raw.decode("utf-8")


def get_system_theme() -> SystemTheme | None:
    """
    :return: The system theme, or None if it cannot be determined.
    """
    theme = SystemTheme(_SDL_GetSystemTheme())
    return None if theme == SystemTheme.UNKNOWN else theme


def screen_saver_enabled() -> bool:
    return bool(_SDL_ScreenSaverEnabled())


def enable_screen_saver() -> None:
    errors.check_bool(_SDL_EnableScreenSaver())


def disable_screen_saver() -> None:
    """
    Prevent the screen from being blanked by a screen saver.

    SDL disables the screen saver by default when the video subsystem is initialized.
    """
    errors.check_bool(_SDL_DisableScreenSaver())


def _mode(pointer: ctypes._Pointer[NativeDisplayMode]) -> DisplayMode:
    return DisplayMode.from_sdl(errors.check_null(pointer).contents)


class Display:
    """
    A display (SDL_DisplayID). Ids are only valid while the display is connected.
    """

    NAME_PROPERTY = "SDL.display.name"
    HDR_ENABLED_BOOLEAN = "SDL.display.HDR_enabled"
    KMSDRM_PANEL_ORIENTATION_NUMBER = "SDL.display.KMSDRM.panel_orientation"

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Display) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"<Display {self.value}>"

    @classmethod
    def get_all(cls) -> list[Display]:
        count = ctypes.c_int()
        array = errors.check_null(_SDL_GetDisplays(ctypes.byref(count)))
        return [cls(value) for value in stdinc.take_array(array, count.value)]

    @classmethod
    def get_primary(cls) -> Display:
        return cls(errors.check_id(_SDL_GetPrimaryDisplay()))

    @classmethod
    def for_point(cls, point: Point) -> Display:
        """
        :return: The display containing the point, or the closest display.
        """
        return cls(errors.check_id(_SDL_GetDisplayForPoint(ctypes.byref(point))))

    @classmethod
    def for_rect(cls, rect: Rect) -> Display:
        """
        :return: The display which has the largest intersection with the rectangle.
        """
        return cls(errors.check_id(_SDL_GetDisplayForRect(ctypes.byref(rect))))

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetDisplayProperties(self.value)))

    @property
    def name(self) -> str:
        return errors.check_null(_SDL_GetDisplayName(self.value)).decode("utf-8")

    def get_bounds(self) -> Rect:
        """
        :return: The desktop area represented by the display. The primary display is at 0,0.
        """
        result = Rect()
        errors.check_bool(_SDL_GetDisplayBounds(self.value, ctypes.byref(result)))
        return result

    def get_usable_bounds(self) -> Rect:
        """
        Like get_bounds(), excluding areas reserved by the system like menu bars and docks.
        """
        result = Rect()
        errors.check_bool(_SDL_GetDisplayUsableBounds(self.value, ctypes.byref(result)))
        return result

    def get_natural_orientation(self) -> DisplayOrientation:
        return DisplayOrientation(_SDL_GetNaturalDisplayOrientation(self.value))

    def get_current_orientation(self) -> DisplayOrientation:
        return DisplayOrientation(_SDL_GetCurrentDisplayOrientation(self.value))

    def get_content_scale(self) -> float:
        """
        :return: The scale factor the user asks content on this display to be rendered at.
        """
        return errors.check(_SDL_GetDisplayContentScale(self.value), 0.0)

    def get_fullscreen_modes(self) -> list[DisplayMode]:
        """
        :return: The fullscreen modes, sorted from largest to smallest.
        """
        count = ctypes.c_int()
        array = errors.check_null(_SDL_GetFullscreenDisplayModes(self.value, ctypes.byref(count)))
        # The modes live in the same allocation as the array.
        try:
            return [DisplayMode.from_sdl(array[i].contents) for i in range(count.value)]
        finally:
            stdinc.free(ctypes.cast(array, ctypes.c_void_p))

    def get_closest_fullscreen_mode(
        self, width: int, height: int, refresh_rate: float = 0.0, include_high_density_modes: bool = False
    ) -> DisplayMode:
        """
        :param refresh_rate: The desired refresh rate, 0.0 for the desktop refresh rate.
        """
        result = NativeDisplayMode()
        errors.check_bool(
            _SDL_GetClosestFullscreenDisplayMode(
                self.value, width, height, refresh_rate, include_high_density_modes, ctypes.byref(result)
            )
        )
        return DisplayMode.from_sdl(result)

    def get_desktop_mode(self) -> DisplayMode:
        """
        :return: The mode of the desktop, which stays the same while a fullscreen mode is active.
        """
        return _mode(_SDL_GetDesktopDisplayMode(self.value))

    def get_current_mode(self) -> DisplayMode:
        return _mode(_SDL_GetCurrentDisplayMode(self.value))


class BordersSize(NamedTuple):
    top: int
    left: int
    bottom: int
    right: int


@dataclass
class WindowCreateProperties:
    """
    Properties for Window.create_with_properties().
    """

    title: str | None = None
    x: int | None = None
    y: int | None = None
    width: int | None = None
    height: int | None = None
    flags: WindowFlags | None = None
    parent: Window | None = None
    always_on_top: bool | None = None
    borderless: bool | None = None
    focusable: bool | None = None
    external_graphics_context: bool | None = None
    fullscreen: bool | None = None
    hidden: bool | None = None
    high_pixel_density: bool | None = None
    maximized: bool | None = None
    menu: bool | None = None
    metal: bool | None = None
    minimized: bool | None = None
    modal: bool | None = None
    mouse_grabbed: bool | None = None
    opengl: bool | None = None
    resizable: bool | None = None
    tooltip: bool | None = None
    transparent: bool | None = None
    utility: bool | None = None
    vulkan: bool | None = None

    PREFIX = "SDL.window.create."

    def apply(self, group: properties.Group) -> None:
        """
        Write the set fields into the group.
        """
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value is None:
                continue
            if name == "parent":
                value = ctypes.cast(value.pointer, ctypes.c_void_p)
            elif name == "flags":
                value = int(value)
            group.set(self.PREFIX + name, value)


class Window(AbstractContextManager["Window"]):
    """
    A window (SDL_Window).
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Window]) -> None:
        self.pointer = pointer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return self._address == other._address

    def __hash__(self) -> int:
        return hash(self._address)

    def __repr__(self) -> str:
        if not self.pointer:
            return "<Window destroyed>"
        return f"<Window {self.id}>"

    @property
    def _address(self) -> int | None:
        return ctypes.cast(self.pointer, ctypes.c_void_p).value

    @classmethod
    def create(cls, title: str, width: int, height: int, flags: WindowFlags = WindowFlags.NONE) -> Self:
        """
        Create a window with the specified dimensions and flags.

        :param width: The width in screen coordinates.
        :param height: The height in screen coordinates.
        """
        return cls(errors.check_null(_SDL_CreateWindow(title.encode("utf-8"), width, height, flags)))

    @classmethod
    def create_popup(
        cls, parent: Window, x: int, y: int, width: int, height: int, flags: WindowFlags = WindowFlags.TOOLTIP
    ) -> Self:
        """
        Create a child popup window. The flags must contain TOOLTIP or POPUP_MENU.

        :param x: Offset relative to the parent window.
        """
        if not flags & (WindowFlags.TOOLTIP | WindowFlags.POPUP_MENU):
            errors.invalid_param_error("flags")
        return cls(errors.check_null(_SDL_CreatePopupWindow(parent.pointer, x, y, width, height, flags)))

    @classmethod
    def create_with_properties(cls, props: WindowCreateProperties) -> Self:
        with properties.Group.create() as group:
            props.apply(group)
            return cls(errors.check_null(_SDL_CreateWindowWithProperties(group.value)))

    @classmethod
    def from_id(cls, window_id: int) -> Self:
        return cls(errors.check_null(_SDL_GetWindowFromID(window_id)))

    @classmethod
    def get_all(cls) -> list[Window]:
        count = ctypes.c_int()
        array = errors.check_null(_SDL_GetWindows(ctypes.byref(count)))
        return [cls(pointer) for pointer in stdinc.take_array(array, count.value)]

    @classmethod
    def get_grabbed(cls) -> Window | None:
        """
        :return: The window that currently has an input grab enabled, if any.
        """
        pointer = _SDL_GetGrabbedWindow()
        return cls(pointer) if pointer else None

    def destroy(self) -> None:
        """
        Destroy the window. Destroying a destroyed window does nothing.
        """
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _WindowP()
        _SDL_DestroyWindow(pointer)

    @property
    def id(self) -> int:
        return errors.check_id(_SDL_GetWindowID(self.pointer))

    @property
    def parent(self) -> Window | None:
        pointer = _SDL_GetWindowParent(self.pointer)
        return Window(pointer) if pointer else None

    @parent.setter
    def parent(self, parent: Window | None) -> None:
        errors.check_bool(_SDL_SetWindowParent(self.pointer, None if parent is None else parent.pointer))

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetWindowProperties(self.pointer)))

    @property
    def flags(self) -> WindowFlags:
        return WindowFlags(_SDL_GetWindowFlags(self.pointer))

    @property
    def display(self) -> Display:
        return Display(errors.check_id(_SDL_GetDisplayForWindow(self.pointer)))

    @property
    def pixel_density(self) -> float:
        return errors.check(_SDL_GetWindowPixelDensity(self.pointer), 0.0)

    @property
    def display_scale(self) -> float:
        """
        The content scale of the display multiplied by the pixel density of the window.
        """
        return errors.check(_SDL_GetWindowDisplayScale(self.pointer), 0.0)

    @property
    def pixel_format(self) -> PixelFormat:
        return PixelFormat(errors.check(_SDL_GetWindowPixelFormat(self.pointer), PixelFormat.UNKNOWN))

    @property
    def title(self) -> str:
        return _SDL_GetWindowTitle(self.pointer).decode("utf-8")

    @title.setter
    def title(self, title: str) -> None:
        errors.check_bool(_SDL_SetWindowTitle(self.pointer, title.encode("utf-8")))

    @property
    def opacity(self) -> float:
        return errors.check(_SDL_GetWindowOpacity(self.pointer), -1.0)

    @opacity.setter
    def opacity(self, opacity: float) -> None:
        errors.check_bool(_SDL_SetWindowOpacity(self.pointer, opacity))

    def get_fullscreen_mode(self) -> DisplayMode | None:
        """
        :return: The exclusive fullscreen mode, or None for borderless fullscreen desktop mode.
        """
        pointer = _SDL_GetWindowFullscreenMode(self.pointer)
        return DisplayMode.from_sdl(pointer.contents) if pointer else None

    def set_fullscreen_mode(self, mode: DisplayMode | None) -> None:
        """
        :param mode: An exclusive mode from Display.get_fullscreen_modes(), or None for borderless fullscreen.
        """
        native = None if mode is None else ctypes.byref(mode.to_sdl())
        errors.check_bool(_SDL_SetWindowFullscreenMode(self.pointer, native))

    def set_icon(self, icon: Surface) -> None:
        errors.check_bool(_SDL_SetWindowIcon(self.pointer, icon.pointer))

    def _pair(self, func: Function) -> tuple[int, int]:
        a, b = ctypes.c_int(), ctypes.c_int()
        errors.check_bool(func(self.pointer, ctypes.byref(a), ctypes.byref(b)))
        return a.value, b.value

    def get_position(self) -> tuple[int, int]:
        return self._pair(_SDL_GetWindowPosition)

    def set_position(self, x: int, y: int) -> None:
        """
        :param x: A coordinate, WINDOWPOS_CENTERED or WINDOWPOS_UNDEFINED.
        """
        errors.check_bool(_SDL_SetWindowPosition(self.pointer, x, y))

    def get_size(self) -> tuple[int, int]:
        """
        :return: The size of the client area in screen coordinates.
        """
        return self._pair(_SDL_GetWindowSize)

    def set_size(self, width: int, height: int) -> None:
        errors.check_bool(_SDL_SetWindowSize(self.pointer, width, height))

    def get_size_in_pixels(self) -> tuple[int, int]:
        return self._pair(_SDL_GetWindowSizeInPixels)

    def get_minimum_size(self) -> tuple[int, int]:
        return self._pair(_SDL_GetWindowMinimumSize)

    def set_minimum_size(self, width: int, height: int) -> None:
        errors.check_bool(_SDL_SetWindowMinimumSize(self.pointer, width, height))

    def get_maximum_size(self) -> tuple[int, int]:
        return self._pair(_SDL_GetWindowMaximumSize)

    def set_maximum_size(self, width: int, height: int) -> None:
        errors.check_bool(_SDL_SetWindowMaximumSize(self.pointer, width, height))

    def get_safe_area(self) -> Rect:
        """
        :return: The area of the window not obscured by notches or rounded corners.
        """
        result = Rect()
        errors.check_bool(_SDL_GetWindowSafeArea(self.pointer, ctypes.byref(result)))
        return result

    def get_aspect_ratio(self) -> tuple[float, float]:
        a, b = ctypes.c_float(), ctypes.c_float()
        errors.check_bool(_SDL_GetWindowAspectRatio(self.pointer, ctypes.byref(a), ctypes.byref(b)))
        return a.value, b.value

    def set_aspect_ratio(self, min_aspect: float, max_aspect: float) -> None:
        """
        :param min_aspect: The minimum width/height ratio, 0.0 for no limit.
        :param max_aspect: The maximum width/height ratio, 0.0 for no limit.
        """
        errors.check_bool(_SDL_SetWindowAspectRatio(self.pointer, min_aspect, max_aspect))

    def get_borders_size(self) -> BordersSize:
        """
        :return: The size of the window's decorations.
        """
        values = [ctypes.c_int() for _ in range(4)]
        errors.check_bool(_SDL_GetWindowBordersSize(self.pointer, *map(ctypes.byref, values)))
        return BordersSize(*(v.value for v in values))

    def set_bordered(self, bordered: bool) -> None:
        errors.check_bool(_SDL_SetWindowBordered(self.pointer, bordered))

    def set_resizable(self, resizable: bool) -> None:
        errors.check_bool(_SDL_SetWindowResizable(self.pointer, resizable))

    def set_always_on_top(self, on_top: bool) -> None:
        errors.check_bool(_SDL_SetWindowAlwaysOnTop(self.pointer, on_top))

    def set_modal(self, modal: bool) -> None:
        errors.check_bool(_SDL_SetWindowModal(self.pointer, modal))

    def set_focusable(self, focusable: bool) -> None:
        errors.check_bool(_SDL_SetWindowFocusable(self.pointer, focusable))

    def set_fullscreen(self, fullscreen: bool) -> None:
        errors.check_bool(_SDL_SetWindowFullscreen(self.pointer, fullscreen))

    def show(self) -> None:
        errors.check_bool(_SDL_ShowWindow(self.pointer))

    def hide(self) -> None:
        errors.check_bool(_SDL_HideWindow(self.pointer))

    def raise_(self) -> None:
        """
        Request that the window be raised above other windows and gain input focus.
        """
        errors.check_bool(_SDL_RaiseWindow(self.pointer))

    def maximize(self) -> None:
        errors.check_bool(_SDL_MaximizeWindow(self.pointer))

    def minimize(self) -> None:
        errors.check_bool(_SDL_MinimizeWindow(self.pointer))

    def restore(self) -> None:
        errors.check_bool(_SDL_RestoreWindow(self.pointer))

    def sync(self) -> None:
        """
        Block until pending position, size and state changes are applied.

        :raises SdlError: If the operation timed out.
        """
        errors.check_bool(_SDL_SyncWindow(self.pointer))

    def show_system_menu(self, x: int, y: int) -> None:
        errors.check_bool(_SDL_ShowWindowSystemMenu(self.pointer, x, y))

    def flash(self, operation: FlashOperation = FlashOperation.BRIEFLY) -> None:
        errors.check_bool(_SDL_FlashWindow(self.pointer, operation))

    def has_surface(self) -> bool:
        return bool(_SDL_WindowHasSurface(self.pointer))

    def get_surface(self) -> Surface:
        """
        Get the surface associated with the window, creating it if necessary.

        The surface is owned by the window and is invalidated when the window is resized.
        Destroying the returned handle does not free it.
        """
        return Surface(errors.check_null(_SDL_GetWindowSurface(self.pointer)))

    def destroy_surface(self) -> None:
        errors.check_bool(_SDL_DestroyWindowSurface(self.pointer))

    def get_surface_vsync(self) -> int:
        result = ctypes.c_int()
        errors.check_bool(_SDL_GetWindowSurfaceVSync(self.pointer, ctypes.byref(result)))
        return result.value

    def set_surface_vsync(self, vsync: int) -> None:
        """
        :param vsync: The vertical refresh sync interval. 0 disables vsync, -1 selects adaptive vsync.
        """
        errors.check_bool(_SDL_SetWindowSurfaceVSync(self.pointer, vsync))

    def update_surface(self, rects: Sequence[Rect] | None = None) -> None:
        """
        Copy the window surface to the screen.

        :param rects: Only copy these areas.
        """
        if rects is None:
            errors.check_bool(_SDL_UpdateWindowSurface(self.pointer))
            return

        array = (Rect * len(rects))(*rects)
        errors.check_bool(_SDL_UpdateWindowSurfaceRects(self.pointer, array, len(rects)))

    @property
    def keyboard_grab(self) -> bool:
        return bool(_SDL_GetWindowKeyboardGrab(self.pointer))

    @keyboard_grab.setter
    def keyboard_grab(self, grabbed: bool) -> None:
        errors.check_bool(_SDL_SetWindowKeyboardGrab(self.pointer, grabbed))

    @property
    def mouse_grab(self) -> bool:
        return bool(_SDL_GetWindowMouseGrab(self.pointer))

    @mouse_grab.setter
    def mouse_grab(self, grabbed: bool) -> None:
        errors.check_bool(_SDL_SetWindowMouseGrab(self.pointer, grabbed))

    def get_mouse_rect(self) -> Rect | None:
        pointer = _SDL_GetWindowMouseRect(self.pointer)
        if not pointer:
            return None
        return Rect(*pointer.contents)

    def set_mouse_rect(self, rect: Rect | None) -> None:
        """
        Confine the cursor to an area of the window. None removes the confinement.
        """
        errors.check_bool(_SDL_SetWindowMouseRect(self.pointer, None if rect is None else ctypes.byref(rect)))
