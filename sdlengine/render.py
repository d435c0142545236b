# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
2D accelerated rendering.

A Renderer draws into a window (or a surface, with the software renderer).
Textures are images living on the renderer's device:

    >>> with Renderer.create(window) as renderer:
    ...     renderer.set_draw_color(0, 0, 0)
    ...     renderer.clear()
    ...     renderer.render_texture(texture)
    ...     renderer.present()

Textures belong to their renderer and become invalid when it is destroyed.
"""

from __future__ import annotations

import ctypes
from collections.abc import Buffer, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import IntEnum
from types import TracebackType
from typing import Any, NamedTuple, Self

from . import errors, properties
from ._dll import Function, bind
from .blend_mode import BlendMode, to_blend_mode
from .pixels import Color, FColor, PixelFormat
from .rect import FPoint, FRect, Rect
from .surface import FlipMode, ScaleMode, Surface, _SurfaceP
from .video import Window, WindowFlags, _WindowP

__all__ = [
    "SOFTWARE_RENDERER",
    "VSYNC_ADAPTIVE",
    "VSYNC_DISABLED",
    "LogicalPresentation",
    "LogicalSize",
    "Renderer",
    "Texture",
    "TextureAccess",
    "TextureCreateProperties",
    "Vertex",
    "get_drivers",
]


#: The name of the software renderer.
SOFTWARE_RENDERER = "software"

VSYNC_DISABLED = 0
VSYNC_ADAPTIVE = -1


class TextureAccess(IntEnum):
    #: Changes rarely, not lockable.
    STATIC = 0
    #: Changes frequently, lockable.
    STREAMING = 1
    #: Can be used as a render target.
    TARGET = 2


class LogicalPresentation(IntEnum):
    """
    How the logical size is mapped to the output.
    """

    DISABLED = 0
    STRETCH = 1
    LETTERBOX = 2
    OVERSCAN = 3
    INTEGER_SCALE = 4


class Vertex(ctypes.Structure):
    """
    Vertex structure for Renderer.render_geometry().
    """

    _fields_ = [("position", FPoint), ("color", FColor), ("tex_coord", FPoint)]

    def __repr__(self) -> str:
        return f"Vertex({self.position!r}, {self.color!r}, {self.tex_coord!r})"


class _Texture(ctypes.Structure):
    # The public, read-only part of SDL_Texture.
    _fields_ = [
        ("format", ctypes.c_uint32),
        ("w", ctypes.c_int),
        ("h", ctypes.c_int),
        ("refcount", ctypes.c_int),
    ]


class _Renderer(ctypes.Structure):
    pass


_RendererP = ctypes.POINTER(_Renderer)
_TextureP = ctypes.POINTER(_Texture)
_RectP = ctypes.POINTER(Rect)
_FRectP = ctypes.POINTER(FRect)
_FPointP = ctypes.POINTER(FPoint)
_IntP = ctypes.POINTER(ctypes.c_int)
_FloatP = ctypes.POINTER(ctypes.c_float)
_U8P = ctypes.POINTER(ctypes.c_uint8)
_U8 = ctypes.c_uint8
_F = ctypes.c_float

_SDL_GetNumRenderDrivers = bind("SDL_GetNumRenderDrivers", [], ctypes.c_int)
_SDL_GetRenderDriver = bind("SDL_GetRenderDriver", [ctypes.c_int], ctypes.c_char_p)
_SDL_CreateWindowAndRenderer = bind(
    "SDL_CreateWindowAndRenderer",
    [ctypes.c_char_p, ctypes.c_int, ctypes.c_int, ctypes.c_uint64, ctypes.POINTER(_WindowP), ctypes.POINTER(_RendererP)],
    ctypes.c_bool,
)
_SDL_CreateRenderer = bind("SDL_CreateRenderer", [_WindowP, ctypes.c_char_p], _RendererP)
_SDL_CreateRendererWithProperties = bind("SDL_CreateRendererWithProperties", [ctypes.c_uint32], _RendererP)
_SDL_CreateSoftwareRenderer = bind("SDL_CreateSoftwareRenderer", [_SurfaceP], _RendererP)
_SDL_GetRenderer = bind("SDL_GetRenderer", [_WindowP], _RendererP)
_SDL_GetRenderWindow = bind("SDL_GetRenderWindow", [_RendererP], _WindowP)
_SDL_GetRendererName = bind("SDL_GetRendererName", [_RendererP], ctypes.c_char_p)
_SDL_GetRendererProperties = bind("SDL_GetRendererProperties", [_RendererP], ctypes.c_uint32)
_SDL_GetRenderOutputSize = bind("SDL_GetRenderOutputSize", [_RendererP, _IntP, _IntP], ctypes.c_bool)
_SDL_GetCurrentRenderOutputSize = bind("SDL_GetCurrentRenderOutputSize", [_RendererP, _IntP, _IntP], ctypes.c_bool)
_SDL_CreateTexture = bind(
    "SDL_CreateTexture", [_RendererP, ctypes.c_uint32, ctypes.c_int, ctypes.c_int, ctypes.c_int], _TextureP
)
_SDL_CreateTextureFromSurface = bind("SDL_CreateTextureFromSurface", [_RendererP, _SurfaceP], _TextureP)
_SDL_CreateTextureWithProperties = bind("SDL_CreateTextureWithProperties", [_RendererP, ctypes.c_uint32], _TextureP)
_SDL_GetTextureProperties = bind("SDL_GetTextureProperties", [_TextureP], ctypes.c_uint32)
_SDL_GetRendererFromTexture = bind("SDL_GetRendererFromTexture", [_TextureP], _RendererP)
_SDL_GetTextureSize = bind("SDL_GetTextureSize", [_TextureP, _FloatP, _FloatP], ctypes.c_bool)
_SDL_SetTextureColorMod = bind("SDL_SetTextureColorMod", [_TextureP, _U8, _U8, _U8], ctypes.c_bool)
_SDL_SetTextureColorModFloat = bind("SDL_SetTextureColorModFloat", [_TextureP, _F, _F, _F], ctypes.c_bool)
_SDL_GetTextureColorMod = bind("SDL_GetTextureColorMod", [_TextureP, _U8P, _U8P, _U8P], ctypes.c_bool)
_SDL_GetTextureColorModFloat = bind("SDL_GetTextureColorModFloat", [_TextureP, _FloatP, _FloatP, _FloatP], ctypes.c_bool)
_SDL_SetTextureAlphaMod = bind("SDL_SetTextureAlphaMod", [_TextureP, _U8], ctypes.c_bool)
_SDL_SetTextureAlphaModFloat = bind("SDL_SetTextureAlphaModFloat", [_TextureP, _F], ctypes.c_bool)
_SDL_GetTextureAlphaMod = bind("SDL_GetTextureAlphaMod", [_TextureP, _U8P], ctypes.c_bool)
_SDL_GetTextureAlphaModFloat = bind("SDL_GetTextureAlphaModFloat", [_TextureP, _FloatP], ctypes.c_bool)
_SDL_SetTextureBlendMode = bind("SDL_SetTextureBlendMode", [_TextureP, ctypes.c_uint32], ctypes.c_bool)
_SDL_GetTextureBlendMode = bind(
    "SDL_GetTextureBlendMode", [_TextureP, ctypes.POINTER(ctypes.c_uint32)], ctypes.c_bool
)
_SDL_SetTextureScaleMode = bind("SDL_SetTextureScaleMode", [_TextureP, ctypes.c_int], ctypes.c_bool)
_SDL_GetTextureScaleMode = bind("SDL_GetTextureScaleMode", [_TextureP, _IntP], ctypes.c_bool)
_SDL_UpdateTexture = bind("SDL_UpdateTexture", [_TextureP, _RectP, ctypes.c_void_p, ctypes.c_int], ctypes.c_bool)
_SDL_UpdateYUVTexture = bind(
    "SDL_UpdateYUVTexture",
    [_TextureP, _RectP, ctypes.c_void_p, ctypes.c_int, ctypes.c_void_p, ctypes.c_int, ctypes.c_void_p, ctypes.c_int],
    ctypes.c_bool,
)
_SDL_UpdateNVTexture = bind(
    "SDL_UpdateNVTexture",
    [_TextureP, _RectP, ctypes.c_void_p, ctypes.c_int, ctypes.c_void_p, ctypes.c_int],
    ctypes.c_bool,
)
_SDL_LockTexture = bind(
    "SDL_LockTexture", [_TextureP, _RectP, ctypes.POINTER(ctypes.c_void_p), _IntP], ctypes.c_bool
)
_SDL_LockTextureToSurface = bind(
    "SDL_LockTextureToSurface", [_TextureP, _RectP, ctypes.POINTER(_SurfaceP)], ctypes.c_bool
)
_SDL_UnlockTexture = bind("SDL_UnlockTexture", [_TextureP], None)
_SDL_SetRenderTarget = bind("SDL_SetRenderTarget", [_RendererP, _TextureP], ctypes.c_bool)
_SDL_GetRenderTarget = bind("SDL_GetRenderTarget", [_RendererP], _TextureP)
_SDL_SetRenderLogicalPresentation = bind(
    "SDL_SetRenderLogicalPresentation", [_RendererP, ctypes.c_int, ctypes.c_int, ctypes.c_int], ctypes.c_bool
)
_SDL_GetRenderLogicalPresentation = bind(
    "SDL_GetRenderLogicalPresentation", [_RendererP, _IntP, _IntP, _IntP], ctypes.c_bool
)
_SDL_GetRenderLogicalPresentationRect = bind(
    "SDL_GetRenderLogicalPresentationRect", [_RendererP, _FRectP], ctypes.c_bool
)
_SDL_RenderCoordinatesFromWindow = bind(
    "SDL_RenderCoordinatesFromWindow", [_RendererP, _F, _F, _FloatP, _FloatP], ctypes.c_bool
)
_SDL_RenderCoordinatesToWindow = bind(
    "SDL_RenderCoordinatesToWindow", [_RendererP, _F, _F, _FloatP, _FloatP], ctypes.c_bool
)
_SDL_SetRenderViewport = bind("SDL_SetRenderViewport", [_RendererP, _RectP], ctypes.c_bool)
_SDL_GetRenderViewport = bind("SDL_GetRenderViewport", [_RendererP, _RectP], ctypes.c_bool)
_SDL_RenderViewportSet = bind("SDL_RenderViewportSet", [_RendererP], ctypes.c_bool)
_SDL_GetRenderSafeArea = bind("SDL_GetRenderSafeArea", [_RendererP, _RectP], ctypes.c_bool)
_SDL_SetRenderClipRect = bind("SDL_SetRenderClipRect", [_RendererP, _RectP], ctypes.c_bool)
_SDL_GetRenderClipRect = bind("SDL_GetRenderClipRect", [_RendererP, _RectP], ctypes.c_bool)
_SDL_RenderClipEnabled = bind("SDL_RenderClipEnabled", [_RendererP], ctypes.c_bool)
_SDL_SetRenderScale = bind("SDL_SetRenderScale", [_RendererP, _F, _F], ctypes.c_bool)
_SDL_GetRenderScale = bind("SDL_GetRenderScale", [_RendererP, _FloatP, _FloatP], ctypes.c_bool)
_SDL_SetRenderDrawColor = bind("SDL_SetRenderDrawColor", [_RendererP, _U8, _U8, _U8, _U8], ctypes.c_bool)
_SDL_SetRenderDrawColorFloat = bind("SDL_SetRenderDrawColorFloat", [_RendererP, _F, _F, _F, _F], ctypes.c_bool)
_SDL_GetRenderDrawColor = bind("SDL_GetRenderDrawColor", [_RendererP, _U8P, _U8P, _U8P, _U8P], ctypes.c_bool)
_SDL_GetRenderDrawColorFloat = bind(
    "SDL_GetRenderDrawColorFloat", [_RendererP, _FloatP, _FloatP, _FloatP, _FloatP], ctypes.c_bool
)
_SDL_SetRenderColorScale = bind("SDL_SetRenderColorScale", [_RendererP, _F], ctypes.c_bool)
_SDL_GetRenderColorScale = bind("SDL_GetRenderColorScale", [_RendererP, _FloatP], ctypes.c_bool)
_SDL_SetRenderDrawBlendMode = bind("SDL_SetRenderDrawBlendMode", [_RendererP, ctypes.c_uint32], ctypes.c_bool)
_SDL_GetRenderDrawBlendMode = bind(
    "SDL_GetRenderDrawBlendMode", [_RendererP, ctypes.POINTER(ctypes.c_uint32)], ctypes.c_bool
)
_SDL_RenderClear = bind("SDL_RenderClear", [_RendererP], ctypes.c_bool)
_SDL_RenderPoint = bind("SDL_RenderPoint", [_RendererP, _F, _F], ctypes.c_bool)
_SDL_RenderPoints = bind("SDL_RenderPoints", [_RendererP, _FPointP, ctypes.c_int], ctypes.c_bool)
_SDL_RenderLine = bind("SDL_RenderLine", [_RendererP, _F, _F, _F, _F], ctypes.c_bool)
_SDL_RenderLines = bind("SDL_RenderLines", [_RendererP, _FPointP, ctypes.c_int], ctypes.c_bool)
_SDL_RenderRect = bind("SDL_RenderRect", [_RendererP, _FRectP], ctypes.c_bool)
_SDL_RenderRects = bind("SDL_RenderRects", [_RendererP, _FRectP, ctypes.c_int], ctypes.c_bool)
_SDL_RenderFillRect = bind("SDL_RenderFillRect", [_RendererP, _FRectP], ctypes.c_bool)
_SDL_RenderFillRects = bind("SDL_RenderFillRects", [_RendererP, _FRectP, ctypes.c_int], ctypes.c_bool)
_SDL_RenderTexture = bind("SDL_RenderTexture", [_RendererP, _TextureP, _FRectP, _FRectP], ctypes.c_bool)
_SDL_RenderTextureRotated = bind(
    "SDL_RenderTextureRotated",
    [_RendererP, _TextureP, _FRectP, _FRectP, ctypes.c_double, _FPointP, ctypes.c_int],
    ctypes.c_bool,
)
_SDL_RenderTextureAffine = bind(
    "SDL_RenderTextureAffine", [_RendererP, _TextureP, _FRectP, _FPointP, _FPointP, _FPointP], ctypes.c_bool
)
_SDL_RenderTextureTiled = bind(
    "SDL_RenderTextureTiled", [_RendererP, _TextureP, _FRectP, _F, _FRectP], ctypes.c_bool
)
_SDL_RenderTexture9Grid = bind(
    "SDL_RenderTexture9Grid", [_RendererP, _TextureP, _FRectP, _F, _F, _F, _F, _F, _FRectP], ctypes.c_bool
)
_SDL_RenderGeometry = bind(
    "SDL_RenderGeometry",
    [_RendererP, _TextureP, ctypes.POINTER(Vertex), ctypes.c_int, _IntP, ctypes.c_int],
    ctypes.c_bool,
)
_SDL_RenderReadPixels = bind("SDL_RenderReadPixels", [_RendererP, _RectP], _SurfaceP)
_SDL_RenderPresent = bind("SDL_RenderPresent", [_RendererP], ctypes.c_bool)
_SDL_DestroyTexture = bind("SDL_DestroyTexture", [_TextureP], None)
_SDL_DestroyRenderer = bind("SDL_DestroyRenderer", [_RendererP], None)
_SDL_FlushRenderer = bind("SDL_FlushRenderer", [_RendererP], ctypes.c_bool)
_SDL_SetRenderVSync = bind("SDL_SetRenderVSync", [_RendererP, ctypes.c_int], ctypes.c_bool)
_SDL_GetRenderVSync = bind("SDL_GetRenderVSync", [_RendererP, _IntP], ctypes.c_bool)
_SDL_RenderDebugText = bind("SDL_RenderDebugText", [_RendererP, _F, _F, ctypes.c_char_p], ctypes.c_bool)


def get_drivers() -> list[str]:
    """
    :return: The names of the render drivers built into SDL, in the order they are tried.
    """
    return [_SDL_GetRenderDriver(i).decode("utf-8") for i in range(_SDL_GetNumRenderDrivers())]


def _ref(value: Any) -> Any:
    return None if value is None else ctypes.byref(value)


def _address(pointer: Any) -> int | None:
    return ctypes.cast(pointer, ctypes.c_void_p).value


class LogicalSize(NamedTuple):
    width: int
    height: int
    mode: LogicalPresentation


@dataclass
class TextureCreateProperties:
    """
    Properties for Renderer.create_texture_with_properties().
    """

    format: PixelFormat | None = None
    access: TextureAccess | None = None
    width: int | None = None
    height: int | None = None
    colorspace: int | None = None
    sdr_white_point: float | None = None
    hdr_headroom: float | None = None

    FORMAT_NUMBER = "SDL.texture.create.format"
    ACCESS_NUMBER = "SDL.texture.create.access"
    WIDTH_NUMBER = "SDL.texture.create.width"
    HEIGHT_NUMBER = "SDL.texture.create.height"
    COLORSPACE_NUMBER = "SDL.texture.create.colorspace"
    SDR_WHITE_POINT_FLOAT = "SDL.texture.create.SDR_white_point"
    HDR_HEADROOM_FLOAT = "SDL.texture.create.HDR_headroom"

    def apply(self, group: properties.Group) -> None:
        for name, value in (
            (self.FORMAT_NUMBER, self.format),
            (self.ACCESS_NUMBER, self.access),
            (self.WIDTH_NUMBER, self.width),
            (self.HEIGHT_NUMBER, self.height),
            (self.COLORSPACE_NUMBER, self.colorspace),
        ):
            if value is not None:
                group.set(name, int(value))
        if self.sdr_white_point is not None:
            group.set(self.SDR_WHITE_POINT_FLOAT, float(self.sdr_white_point))
        if self.hdr_headroom is not None:
            group.set(self.HDR_HEADROOM_FLOAT, float(self.hdr_headroom))


class Texture(AbstractContextManager["Texture"]):
    """
    An efficient driver-specific representation of pixel data (SDL_Texture).
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Texture]) -> None:
        self.pointer = pointer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Texture):
            return NotImplemented
        return _address(self.pointer) == _address(other.pointer)

    def __hash__(self) -> int:
        return hash(_address(self.pointer))

    def __repr__(self) -> str:
        if not self.pointer:
            return "<Texture destroyed>"
        return f"<Texture {self.width}x{self.height} {self.format.name}>"

    def destroy(self) -> None:
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _TextureP()
        _SDL_DestroyTexture(pointer)

    @property
    def format(self) -> PixelFormat:
        return PixelFormat(self.pointer.contents.format)

    @property
    def width(self) -> int:
        return self.pointer.contents.w

    @property
    def height(self) -> int:
        return self.pointer.contents.h

    @property
    def ref_count(self) -> int:
        return self.pointer.contents.refcount

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetTextureProperties(self.pointer)))

    @property
    def renderer(self) -> Renderer:
        return Renderer(errors.check_null(_SDL_GetRendererFromTexture(self.pointer)))

    def get_size(self) -> tuple[float, float]:
        w, h = ctypes.c_float(), ctypes.c_float()
        errors.check_bool(_SDL_GetTextureSize(self.pointer, ctypes.byref(w), ctypes.byref(h)))
        return w.value, h.value

    def set_color_mod(self, r: int, g: int, b: int) -> None:
        """
        Set an additional color value multiplied into render copy operations.
        """
        errors.check_bool(_SDL_SetTextureColorMod(self.pointer, r, g, b))

    def set_color_mod_float(self, r: float, g: float, b: float) -> None:
        errors.check_bool(_SDL_SetTextureColorModFloat(self.pointer, r, g, b))

    def get_color_mod(self) -> tuple[int, int, int]:
        rgb = [ctypes.c_uint8() for _ in range(3)]
        errors.check_bool(_SDL_GetTextureColorMod(self.pointer, *map(ctypes.byref, rgb)))
        return rgb[0].value, rgb[1].value, rgb[2].value

    def get_color_mod_float(self) -> tuple[float, float, float]:
        rgb = [ctypes.c_float() for _ in range(3)]
        errors.check_bool(_SDL_GetTextureColorModFloat(self.pointer, *map(ctypes.byref, rgb)))
        return rgb[0].value, rgb[1].value, rgb[2].value

    def set_alpha_mod(self, alpha: int) -> None:
        errors.check_bool(_SDL_SetTextureAlphaMod(self.pointer, alpha))

    def set_alpha_mod_float(self, alpha: float) -> None:
        errors.check_bool(_SDL_SetTextureAlphaModFloat(self.pointer, alpha))

    def get_alpha_mod(self) -> int:
        alpha = ctypes.c_uint8()
        errors.check_bool(_SDL_GetTextureAlphaMod(self.pointer, ctypes.byref(alpha)))
        return alpha.value

    def get_alpha_mod_float(self) -> float:
        alpha = ctypes.c_float()
        errors.check_bool(_SDL_GetTextureAlphaModFloat(self.pointer, ctypes.byref(alpha)))
        return alpha.value

    def set_blend_mode(self, mode: BlendMode | int) -> None:
        """
        :param mode: A blend mode, or a custom one composed with blend_mode.compose_custom().
        """
        errors.check_bool(_SDL_SetTextureBlendMode(self.pointer, mode))

    def get_blend_mode(self) -> BlendMode | int:
        mode = ctypes.c_uint32()
        errors.check_bool(_SDL_GetTextureBlendMode(self.pointer, ctypes.byref(mode)))
        return to_blend_mode(mode.value)

    def set_scale_mode(self, mode: ScaleMode) -> None:
        errors.check_bool(_SDL_SetTextureScaleMode(self.pointer, mode))

    def get_scale_mode(self) -> ScaleMode:
        mode = ctypes.c_int()
        errors.check_bool(_SDL_GetTextureScaleMode(self.pointer, ctypes.byref(mode)))
        return ScaleMode(mode.value)

    def update(self, data: Buffer, pitch: int, rect: Rect | None = None) -> None:
        """
        Update the texture with new pixel data. The data is copied.

        This is a fairly slow function, intended for use with static textures.

        :param pitch: The number of bytes in a row of pixel data, including padding.
        :param rect: The area to update, or None for the entire texture.
        """
        raw = bytes(data)
        errors.check_bool(_SDL_UpdateTexture(self.pointer, _ref(rect), raw, pitch))

    def update_yuv(
        self,
        y_plane: Buffer,
        y_pitch: int,
        u_plane: Buffer,
        u_pitch: int,
        v_plane: Buffer,
        v_pitch: int,
        rect: Rect | None = None,
    ) -> None:
        """
        Update a planar YV12 or IYUV texture.
        """
        errors.check_bool(
            _SDL_UpdateYUVTexture(
                self.pointer,
                _ref(rect),
                bytes(y_plane),
                y_pitch,
                bytes(u_plane),
                u_pitch,
                bytes(v_plane),
                v_pitch,
            )
        )

    def update_nv(self, y_plane: Buffer, y_pitch: int, uv_plane: Buffer, uv_pitch: int, rect: Rect | None = None) -> None:
        """
        Update an NV12 or NV21 texture.
        """
        errors.check_bool(
            _SDL_UpdateNVTexture(self.pointer, _ref(rect), bytes(y_plane), y_pitch, bytes(uv_plane), uv_pitch)
        )

    def lock(self, rect: Rect | None = None) -> tuple[memoryview, int]:
        """
        Lock an area of a streaming texture for write-only pixel access.

        The returned memory is only valid until unlock() is called.

        :return: The locked pixels and the pitch of a row.
        """
        pixels = ctypes.c_void_p()
        pitch = ctypes.c_int()
        errors.check_bool(_SDL_LockTexture(self.pointer, _ref(rect), ctypes.byref(pixels), ctypes.byref(pitch)))
        height = self.height if rect is None else rect.h
        area = (ctypes.c_char * (pitch.value * height)).from_address(pixels.value or 0)
        return memoryview(area).cast("B"), pitch.value

    def lock_to_surface(self, rect: Rect | None = None) -> Surface:
        """
        Lock an area of a streaming texture and expose it as a surface owned by the texture.

        The surface is freed by unlock().
        """
        surface = _SurfaceP()
        errors.check_bool(_SDL_LockTextureToSurface(self.pointer, _ref(rect), ctypes.byref(surface)))
        return Surface(surface)

    def unlock(self) -> None:
        """
        Upload the changes made in a locked texture.
        """
        _SDL_UnlockTexture(self.pointer)

    @contextmanager
    def locked(self, rect: Rect | None = None) -> Iterator[tuple[memoryview, int]]:
        view, pitch = self.lock(rect)
        try:
            yield view, pitch
        finally:
            view.release()
            self.unlock()


class Renderer(AbstractContextManager["Renderer"]):
    """
    A structure representing rendering state (SDL_Renderer).
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Renderer]) -> None:
        self.pointer = pointer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Renderer):
            return NotImplemented
        return _address(self.pointer) == _address(other.pointer)

    def __hash__(self) -> int:
        return hash(_address(self.pointer))

    def __repr__(self) -> str:
        if not self.pointer:
            return "<Renderer destroyed>"
        return f"<Renderer {self.name}>"

    @classmethod
    def create(cls, window: Window, name: str | None = None) -> Self:
        """
        Create a 2D rendering context for a window.

        :param name: The name of the rendering driver, or None to let SDL choose one.
                     A comma-separated list tries the drivers in order.
        """
        return cls(errors.check_null(_SDL_CreateRenderer(window.pointer, None if name is None else name.encode())))

    @classmethod
    def create_with_properties(cls, group: properties.Group) -> Self:
        return cls(errors.check_null(_SDL_CreateRendererWithProperties(group.value)))

    @classmethod
    def create_software(cls, surface: Surface) -> Self:
        """
        Create a renderer drawing into a surface. The surface must outlive the renderer.
        """
        return cls(errors.check_null(_SDL_CreateSoftwareRenderer(surface.pointer)))

    @classmethod
    def create_with_window(
        cls, title: str, width: int, height: int, flags: WindowFlags = WindowFlags.NONE
    ) -> tuple[Window, Self]:
        """
        Create a window and a default renderer in one step.
        """
        window = _WindowP()
        renderer = _RendererP()
        errors.check_bool(
            _SDL_CreateWindowAndRenderer(
                title.encode("utf-8"), width, height, flags, ctypes.byref(window), ctypes.byref(renderer)
            )
        )
        return Window(window), cls(renderer)

    @classmethod
    def for_window(cls, window: Window) -> Self:
        return cls(errors.check_null(_SDL_GetRenderer(window.pointer)))

    def destroy(self) -> None:
        """
        Destroy the renderer and all of its textures.
        """
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _RendererP()
        _SDL_DestroyRenderer(pointer)

    @property
    def name(self) -> str:
        return errors.check_null(_SDL_GetRendererName(self.pointer)).decode("utf-8")

    @property
    def window(self) -> Window | None:
        pointer = _SDL_GetRenderWindow(self.pointer)
        return Window(pointer) if pointer else None

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetRendererProperties(self.pointer)))

    def _size(self, func: Function) -> tuple[int, int]:
        w, h = ctypes.c_int(), ctypes.c_int()
        errors.check_bool(func(self.pointer, ctypes.byref(w), ctypes.byref(h)))
        return w.value, h.value

    def get_output_size(self) -> tuple[int, int]:
        """
        :return: The output size in pixels, ignoring the render target.
        """
        return self._size(_SDL_GetRenderOutputSize)

    def get_current_output_size(self) -> tuple[int, int]:
        """
        :return: The size of the current render target in pixels.
        """
        return self._size(_SDL_GetCurrentRenderOutputSize)

    # Textures

    def create_texture(self, format: PixelFormat, access: TextureAccess, width: int, height: int) -> Texture:
        return Texture(errors.check_null(_SDL_CreateTexture(self.pointer, format, access, width, height)))

    def create_texture_from_surface(self, surface: Surface) -> Texture:
        """
        Create a static texture with a copy of the surface's pixels.
        """
        return Texture(errors.check_null(_SDL_CreateTextureFromSurface(self.pointer, surface.pointer)))

    def create_texture_with_properties(self, props: TextureCreateProperties) -> Texture:
        with properties.Group.create() as group:
            props.apply(group)
            return Texture(errors.check_null(_SDL_CreateTextureWithProperties(self.pointer, group.value)))

    # Render state

    @property
    def target(self) -> Texture | None:
        """
        The current render target, or None for the default target.
        """
        pointer = _SDL_GetRenderTarget(self.pointer)
        return Texture(pointer) if pointer else None

    @target.setter
    def target(self, texture: Texture | None) -> None:
        errors.check_bool(_SDL_SetRenderTarget(self.pointer, None if texture is None else texture.pointer))

    @contextmanager
    def rendering_to(self, texture: Texture) -> Iterator[Texture]:
        """
        Render into a texture within the block, then restore the previous target.
        """
        previous = self.target
        self.target = texture
        try:
            yield texture
        finally:
            self.target = previous

    def set_logical_presentation(self, width: int, height: int, mode: LogicalPresentation) -> None:
        """
        Set a device independent resolution and presentation mode for rendering.
        """
        errors.check_bool(_SDL_SetRenderLogicalPresentation(self.pointer, width, height, mode))

    def get_logical_presentation(self) -> LogicalSize:
        w, h, mode = ctypes.c_int(), ctypes.c_int(), ctypes.c_int()
        errors.check_bool(
            _SDL_GetRenderLogicalPresentation(self.pointer, ctypes.byref(w), ctypes.byref(h), ctypes.byref(mode))
        )
        return LogicalSize(w.value, h.value, LogicalPresentation(mode.value))

    def get_logical_presentation_rect(self) -> FRect:
        result = FRect()
        errors.check_bool(_SDL_GetRenderLogicalPresentationRect(self.pointer, ctypes.byref(result)))
        return result

    def coordinates_from_window(self, x: float, y: float) -> tuple[float, float]:
        """
        Convert window coordinates to render coordinates.
        """
        rx, ry = ctypes.c_float(), ctypes.c_float()
        errors.check_bool(_SDL_RenderCoordinatesFromWindow(self.pointer, x, y, ctypes.byref(rx), ctypes.byref(ry)))
        return rx.value, ry.value

    def coordinates_to_window(self, x: float, y: float) -> tuple[float, float]:
        wx, wy = ctypes.c_float(), ctypes.c_float()
        errors.check_bool(_SDL_RenderCoordinatesToWindow(self.pointer, x, y, ctypes.byref(wx), ctypes.byref(wy)))
        return wx.value, wy.value

    def set_viewport(self, rect: Rect | None) -> None:
        """
        :param rect: The drawing area, or None for the entire target.
        """
        errors.check_bool(_SDL_SetRenderViewport(self.pointer, _ref(rect)))

    def get_viewport(self) -> Rect:
        result = Rect()
        errors.check_bool(_SDL_GetRenderViewport(self.pointer, ctypes.byref(result)))
        return result

    def viewport_set(self) -> bool:
        return bool(_SDL_RenderViewportSet(self.pointer))

    def get_safe_area(self) -> Rect:
        result = Rect()
        errors.check_bool(_SDL_GetRenderSafeArea(self.pointer, ctypes.byref(result)))
        return result

    def set_clip_rect(self, rect: Rect | None) -> None:
        """
        :param rect: The clip area relative to the viewport, or None to disable clipping.
        """
        errors.check_bool(_SDL_SetRenderClipRect(self.pointer, _ref(rect)))

    def get_clip_rect(self) -> Rect:
        """
        :return: The clip rectangle, empty if clipping is disabled.
        """
        result = Rect()
        errors.check_bool(_SDL_GetRenderClipRect(self.pointer, ctypes.byref(result)))
        return result

    def clip_enabled(self) -> bool:
        return bool(_SDL_RenderClipEnabled(self.pointer))

    def set_scale(self, scale_x: float, scale_y: float) -> None:
        errors.check_bool(_SDL_SetRenderScale(self.pointer, scale_x, scale_y))

    def get_scale(self) -> tuple[float, float]:
        sx, sy = ctypes.c_float(), ctypes.c_float()
        errors.check_bool(_SDL_GetRenderScale(self.pointer, ctypes.byref(sx), ctypes.byref(sy)))
        return sx.value, sy.value

    def set_draw_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        errors.check_bool(_SDL_SetRenderDrawColor(self.pointer, r, g, b, a))

    def set_draw_color_float(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        errors.check_bool(_SDL_SetRenderDrawColorFloat(self.pointer, r, g, b, a))

    def get_draw_color(self) -> Color:
        rgba = [ctypes.c_uint8() for _ in range(4)]
        errors.check_bool(_SDL_GetRenderDrawColor(self.pointer, *map(ctypes.byref, rgba)))
        return Color(*(c.value for c in rgba))

    def get_draw_color_float(self) -> FColor:
        rgba = [ctypes.c_float() for _ in range(4)]
        errors.check_bool(_SDL_GetRenderDrawColorFloat(self.pointer, *map(ctypes.byref, rgba)))
        return FColor(*(c.value for c in rgba))

    def set_color_scale(self, scale: float) -> None:
        """
        Set the color scale multiplied into all drawing after blending.
        """
        errors.check_bool(_SDL_SetRenderColorScale(self.pointer, scale))

    def get_color_scale(self) -> float:
        scale = ctypes.c_float()
        errors.check_bool(_SDL_GetRenderColorScale(self.pointer, ctypes.byref(scale)))
        return scale.value

    def set_draw_blend_mode(self, mode: BlendMode | int) -> None:
        errors.check_bool(_SDL_SetRenderDrawBlendMode(self.pointer, mode))

    def get_draw_blend_mode(self) -> BlendMode | int:
        mode = ctypes.c_uint32()
        errors.check_bool(_SDL_GetRenderDrawBlendMode(self.pointer, ctypes.byref(mode)))
        return to_blend_mode(mode.value)

    def set_vsync(self, vsync: int) -> None:
        """
        :param vsync: 1 to sync with every refresh, 2 for every second one, VSYNC_ADAPTIVE or VSYNC_DISABLED.
        """
        errors.check_bool(_SDL_SetRenderVSync(self.pointer, vsync))

    def get_vsync(self) -> int:
        vsync = ctypes.c_int()
        errors.check_bool(_SDL_GetRenderVSync(self.pointer, ctypes.byref(vsync)))
        return vsync.value

    # Drawing

    def clear(self) -> None:
        """
        Clear the current target with the draw color, ignoring the viewport and clip rectangle.
        """
        errors.check_bool(_SDL_RenderClear(self.pointer))

    def render_point(self, x: float, y: float) -> None:
        errors.check_bool(_SDL_RenderPoint(self.pointer, x, y))

    def render_points(self, points: Sequence[FPoint]) -> None:
        array = (FPoint * len(points))(*points)
        errors.check_bool(_SDL_RenderPoints(self.pointer, array, len(points)))

    def render_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        errors.check_bool(_SDL_RenderLine(self.pointer, x1, y1, x2, y2))

    def render_lines(self, points: Sequence[FPoint]) -> None:
        """
        Draw a series of connected lines.
        """
        array = (FPoint * len(points))(*points)
        errors.check_bool(_SDL_RenderLines(self.pointer, array, len(points)))

    def render_rect(self, rect: FRect | None = None) -> None:
        """
        Draw a rectangle outline. None outlines the entire target.
        """
        errors.check_bool(_SDL_RenderRect(self.pointer, _ref(rect)))

    def render_rects(self, rects: Sequence[FRect]) -> None:
        array = (FRect * len(rects))(*rects)
        errors.check_bool(_SDL_RenderRects(self.pointer, array, len(rects)))

    def render_fill_rect(self, rect: FRect | None = None) -> None:
        errors.check_bool(_SDL_RenderFillRect(self.pointer, _ref(rect)))

    def render_fill_rects(self, rects: Sequence[FRect]) -> None:
        array = (FRect * len(rects))(*rects)
        errors.check_bool(_SDL_RenderFillRects(self.pointer, array, len(rects)))

    def render_texture(self, texture: Texture, src: FRect | None = None, dst: FRect | None = None) -> None:
        """
        Copy a portion of the texture to the current target.

        :param src: The source area, or None for the entire texture.
        :param dst: The destination area, or None for the entire target.
        """
        errors.check_bool(_SDL_RenderTexture(self.pointer, texture.pointer, _ref(src), _ref(dst)))

    def render_texture_rotated(
        self,
        texture: Texture,
        src: FRect | None = None,
        dst: FRect | None = None,
        angle: float = 0.0,
        center: FPoint | None = None,
        flip: FlipMode = FlipMode.NONE,
    ) -> None:
        """
        :param angle: Clockwise rotation in degrees.
        :param center: The rotation center relative to dst, or None for the center of dst.
        """
        errors.check_bool(
            _SDL_RenderTextureRotated(
                self.pointer, texture.pointer, _ref(src), _ref(dst), angle, _ref(center), flip
            )
        )

    def render_texture_affine(
        self,
        texture: Texture,
        src: FRect | None = None,
        origin: FPoint | None = None,
        right: FPoint | None = None,
        down: FPoint | None = None,
    ) -> None:
        """
        Copy a portion of the texture with an affine transform.

        :param origin: Where the top-left corner of src goes, or None for the top-left of the target.
        """
        errors.check_bool(
            _SDL_RenderTextureAffine(
                self.pointer, texture.pointer, _ref(src), _ref(origin), _ref(right), _ref(down)
            )
        )

    def render_texture_tiled(
        self, texture: Texture, src: FRect | None = None, scale: float = 1.0, dst: FRect | None = None
    ) -> None:
        errors.check_bool(_SDL_RenderTextureTiled(self.pointer, texture.pointer, _ref(src), scale, _ref(dst)))

    def render_texture_9grid(
        self,
        texture: Texture,
        left_width: float,
        right_width: float,
        top_height: float,
        bottom_height: float,
        src: FRect | None = None,
        scale: float = 1.0,
        dst: FRect | None = None,
    ) -> None:
        """
        Scale a texture keeping the corners intact and stretching the edges and center.
        """
        errors.check_bool(
            _SDL_RenderTexture9Grid(
                self.pointer,
                texture.pointer,
                _ref(src),
                left_width,
                right_width,
                top_height,
                bottom_height,
                scale,
                _ref(dst),
            )
        )

    def render_geometry(
        self, vertices: Sequence[Vertex], indices: Sequence[int] | None = None, texture: Texture | None = None
    ) -> None:
        """
        Render a list of triangles.

        :param indices: Indices into vertices. Without them, vertices are drawn in sequential triangles.
        """
        vertex_array = (Vertex * len(vertices))(*vertices)
        index_array = None if indices is None else (ctypes.c_int * len(indices))(*indices)
        errors.check_bool(
            _SDL_RenderGeometry(
                self.pointer,
                None if texture is None else texture.pointer,
                vertex_array,
                len(vertices),
                index_array,
                0 if indices is None else len(indices),
            )
        )

    def render_debug_text(self, x: float, y: float, text: str) -> None:
        """
        Draw text with SDL's built-in 8x8 bitmap font.
        """
        errors.check_bool(_SDL_RenderDebugText(self.pointer, x, y, text.encode("utf-8")))

    def read_pixels(self, rect: Rect | None = None) -> Surface:
        """
        Read pixels from the current target. This is a very slow operation.
        """
        return Surface(errors.check_null(_SDL_RenderReadPixels(self.pointer, _ref(rect))))

    def flush(self) -> None:
        """
        Force pending render commands to be executed.
        """
        errors.check_bool(_SDL_FlushRenderer(self.pointer))

    def present(self) -> None:
        errors.check_bool(_SDL_RenderPresent(self.pointer))
