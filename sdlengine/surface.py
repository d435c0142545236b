# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.surface wraps SDL's software surfaces.

A Surface is a block of pixels in CPU memory, reference counted by SDL.
Each handle owns one reference, which is dropped by destroy() or when
leaving the with-block:

    >>> with Surface.create(64, 64, PixelFormat.RGBA32) as surface:
    ...     surface.fill_rect(None, surface.map_rgba(255, 0, 0, 255))
    ...     with surface.locked():
    ...         pixels = surface.as_array()

as_array() returns a numpy view of the pixel memory. The view is only valid
while the surface is alive (and locked, if the surface requires locking).
"""

from __future__ import annotations

import ctypes
from collections.abc import Buffer, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from os import PathLike, fspath
from types import TracebackType
from typing import Any, Self

import numpy as np

from . import errors, pixels, properties, stdinc
from ._dll import bind
from .blend_mode import BlendMode, to_blend_mode
from .io_stream import Stream, _IOStreamP
from .pixels import Color, Colorspace, Palette, PixelFormat
from .rect import Rect

__all__ = [
    "FlipMode",
    "ScaleMode",
    "Surface",
    "SurfaceFlags",
    "SurfaceProperties",
    "convert_pixels",
    "convert_pixels_and_colorspace",
    "premultiply_alpha",
]


class SurfaceFlags(IntFlag):
    #: Surface uses preallocated pixel memory.
    PREALLOCATED = 0x00000001
    #: Surface needs to be locked to access pixels.
    LOCK_NEEDED = 0x00000002
    #: Surface is currently locked.
    LOCKED = 0x00000004
    #: Surface uses pixel memory allocated with SDL_aligned_alloc().
    SIMD_ALIGNED = 0x00000008


class FlipMode(IntEnum):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class ScaleMode(IntEnum):
    NEAREST = 0
    LINEAR = 1


class _Surface(ctypes.Structure):
    _fields_ = [
        ("flags", ctypes.c_uint32),
        ("format", ctypes.c_int),
        ("w", ctypes.c_int),
        ("h", ctypes.c_int),
        ("pitch", ctypes.c_int),
        ("pixels", ctypes.c_void_p),
        ("refcount", ctypes.c_int),
        ("reserved", ctypes.c_void_p),
    ]


_SurfaceP = ctypes.POINTER(_Surface)
_PaletteP = ctypes.POINTER(pixels._Palette)
_RectP = ctypes.POINTER(Rect)
_U8P = ctypes.POINTER(ctypes.c_uint8)
_FloatP = ctypes.POINTER(ctypes.c_float)

_SDL_CreateSurface = bind("SDL_CreateSurface", [ctypes.c_int, ctypes.c_int, ctypes.c_int], _SurfaceP)
_SDL_CreateSurfaceFrom = bind(
    "SDL_CreateSurfaceFrom", [ctypes.c_int, ctypes.c_int, ctypes.c_int, ctypes.c_void_p, ctypes.c_int], _SurfaceP
)
_SDL_DestroySurface = bind("SDL_DestroySurface", [_SurfaceP], None)
_SDL_GetSurfaceProperties = bind("SDL_GetSurfaceProperties", [_SurfaceP], ctypes.c_uint32)
_SDL_SetSurfaceColorspace = bind("SDL_SetSurfaceColorspace", [_SurfaceP, ctypes.c_int], ctypes.c_bool)
_SDL_GetSurfaceColorspace = bind("SDL_GetSurfaceColorspace", [_SurfaceP], ctypes.c_int)
_SDL_CreateSurfacePalette = bind("SDL_CreateSurfacePalette", [_SurfaceP], _PaletteP)
_SDL_SetSurfacePalette = bind("SDL_SetSurfacePalette", [_SurfaceP, _PaletteP], ctypes.c_bool)
_SDL_GetSurfacePalette = bind("SDL_GetSurfacePalette", [_SurfaceP], _PaletteP)
_SDL_AddSurfaceAlternateImage = bind("SDL_AddSurfaceAlternateImage", [_SurfaceP, _SurfaceP], ctypes.c_bool)
_SDL_SurfaceHasAlternateImages = bind("SDL_SurfaceHasAlternateImages", [_SurfaceP], ctypes.c_bool)
_SDL_GetSurfaceImages = bind(
    "SDL_GetSurfaceImages", [_SurfaceP, ctypes.POINTER(ctypes.c_int)], ctypes.POINTER(_SurfaceP)
)
_SDL_RemoveSurfaceAlternateImages = bind("SDL_RemoveSurfaceAlternateImages", [_SurfaceP], None)
_SDL_LockSurface = bind("SDL_LockSurface", [_SurfaceP], ctypes.c_bool)
_SDL_UnlockSurface = bind("SDL_UnlockSurface", [_SurfaceP], None)
_SDL_LoadBMP_IO = bind("SDL_LoadBMP_IO", [_IOStreamP, ctypes.c_bool], _SurfaceP)
_SDL_LoadBMP = bind("SDL_LoadBMP", [ctypes.c_char_p], _SurfaceP)
_SDL_SaveBMP_IO = bind("SDL_SaveBMP_IO", [_SurfaceP, _IOStreamP, ctypes.c_bool], ctypes.c_bool)
_SDL_SaveBMP = bind("SDL_SaveBMP", [_SurfaceP, ctypes.c_char_p], ctypes.c_bool)
_SDL_SetSurfaceRLE = bind("SDL_SetSurfaceRLE", [_SurfaceP, ctypes.c_bool], ctypes.c_bool)
_SDL_SurfaceHasRLE = bind("SDL_SurfaceHasRLE", [_SurfaceP], ctypes.c_bool)
_SDL_SetSurfaceColorKey = bind("SDL_SetSurfaceColorKey", [_SurfaceP, ctypes.c_bool, ctypes.c_uint32], ctypes.c_bool)
_SDL_SurfaceHasColorKey = bind("SDL_SurfaceHasColorKey", [_SurfaceP], ctypes.c_bool)
_SDL_GetSurfaceColorKey = bind(
    "SDL_GetSurfaceColorKey", [_SurfaceP, ctypes.POINTER(ctypes.c_uint32)], ctypes.c_bool
)
_SDL_SetSurfaceColorMod = bind(
    "SDL_SetSurfaceColorMod", [_SurfaceP, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8], ctypes.c_bool
)
_SDL_GetSurfaceColorMod = bind("SDL_GetSurfaceColorMod", [_SurfaceP, _U8P, _U8P, _U8P], ctypes.c_bool)
_SDL_SetSurfaceAlphaMod = bind("SDL_SetSurfaceAlphaMod", [_SurfaceP, ctypes.c_uint8], ctypes.c_bool)
_SDL_GetSurfaceAlphaMod = bind("SDL_GetSurfaceAlphaMod", [_SurfaceP, _U8P], ctypes.c_bool)
_SDL_SetSurfaceBlendMode = bind("SDL_SetSurfaceBlendMode", [_SurfaceP, ctypes.c_uint32], ctypes.c_bool)
_SDL_GetSurfaceBlendMode = bind(
    "SDL_GetSurfaceBlendMode", [_SurfaceP, ctypes.POINTER(ctypes.c_uint32)], ctypes.c_bool
)
_SDL_SetSurfaceClipRect = bind("SDL_SetSurfaceClipRect", [_SurfaceP, _RectP], ctypes.c_bool)
_SDL_GetSurfaceClipRect = bind("SDL_GetSurfaceClipRect", [_SurfaceP, _RectP], ctypes.c_bool)
_SDL_FlipSurface = bind("SDL_FlipSurface", [_SurfaceP, ctypes.c_int], ctypes.c_bool)
_SDL_DuplicateSurface = bind("SDL_DuplicateSurface", [_SurfaceP], _SurfaceP)
_SDL_ScaleSurface = bind("SDL_ScaleSurface", [_SurfaceP, ctypes.c_int, ctypes.c_int, ctypes.c_int], _SurfaceP)
_SDL_ConvertSurface = bind("SDL_ConvertSurface", [_SurfaceP, ctypes.c_int], _SurfaceP)
_SDL_ConvertSurfaceAndColorspace = bind(
    "SDL_ConvertSurfaceAndColorspace",
    [_SurfaceP, ctypes.c_int, _PaletteP, ctypes.c_int, ctypes.c_uint32],
    _SurfaceP,
)
_SDL_ConvertPixels = bind(
    "SDL_ConvertPixels",
    [
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_void_p,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_void_p,
        ctypes.c_int,
    ],
    ctypes.c_bool,
)
_SDL_ConvertPixelsAndColorspace = bind(
    "SDL_ConvertPixelsAndColorspace",
    [
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_uint32,
        ctypes.c_void_p,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_uint32,
        ctypes.c_void_p,
        ctypes.c_int,
    ],
    ctypes.c_bool,
)
_SDL_PremultiplyAlpha = bind(
    "SDL_PremultiplyAlpha",
    [
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_void_p,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_void_p,
        ctypes.c_int,
        ctypes.c_bool,
    ],
    ctypes.c_bool,
)
_SDL_PremultiplySurfaceAlpha = bind("SDL_PremultiplySurfaceAlpha", [_SurfaceP, ctypes.c_bool], ctypes.c_bool)
_SDL_ClearSurface = bind(
    "SDL_ClearSurface", [_SurfaceP, ctypes.c_float, ctypes.c_float, ctypes.c_float, ctypes.c_float], ctypes.c_bool
)
_SDL_FillSurfaceRect = bind("SDL_FillSurfaceRect", [_SurfaceP, _RectP, ctypes.c_uint32], ctypes.c_bool)
_SDL_FillSurfaceRects = bind(
    "SDL_FillSurfaceRects", [_SurfaceP, _RectP, ctypes.c_int, ctypes.c_uint32], ctypes.c_bool
)
_SDL_BlitSurface = bind("SDL_BlitSurface", [_SurfaceP, _RectP, _SurfaceP, _RectP], ctypes.c_bool)
_SDL_BlitSurfaceUnchecked = bind("SDL_BlitSurfaceUnchecked", [_SurfaceP, _RectP, _SurfaceP, _RectP], ctypes.c_bool)
_SDL_BlitSurfaceScaled = bind(
    "SDL_BlitSurfaceScaled", [_SurfaceP, _RectP, _SurfaceP, _RectP, ctypes.c_int], ctypes.c_bool
)
_SDL_BlitSurfaceUncheckedScaled = bind(
    "SDL_BlitSurfaceUncheckedScaled", [_SurfaceP, _RectP, _SurfaceP, _RectP, ctypes.c_int], ctypes.c_bool
)
_SDL_StretchSurface = bind("SDL_StretchSurface", [_SurfaceP, _RectP, _SurfaceP, _RectP, ctypes.c_int], ctypes.c_bool)
_SDL_BlitSurfaceTiled = bind("SDL_BlitSurfaceTiled", [_SurfaceP, _RectP, _SurfaceP, _RectP], ctypes.c_bool)
_SDL_BlitSurfaceTiledWithScale = bind(
    "SDL_BlitSurfaceTiledWithScale",
    [_SurfaceP, _RectP, ctypes.c_float, ctypes.c_int, _SurfaceP, _RectP],
    ctypes.c_bool,
)
_SDL_BlitSurface9Grid = bind(
    "SDL_BlitSurface9Grid",
    [
        _SurfaceP,
        _RectP,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_int,
        ctypes.c_float,
        ctypes.c_int,
        _SurfaceP,
        _RectP,
    ],
    ctypes.c_bool,
)
_SDL_MapSurfaceRGB = bind(
    "SDL_MapSurfaceRGB", [_SurfaceP, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8], ctypes.c_uint32
)
_SDL_MapSurfaceRGBA = bind(
    "SDL_MapSurfaceRGBA", [_SurfaceP, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8], ctypes.c_uint32
)
_SDL_ReadSurfacePixel = bind(
    "SDL_ReadSurfacePixel", [_SurfaceP, ctypes.c_int, ctypes.c_int, _U8P, _U8P, _U8P, _U8P], ctypes.c_bool
)
_SDL_ReadSurfacePixelFloat = bind(
    "SDL_ReadSurfacePixelFloat",
    [_SurfaceP, ctypes.c_int, ctypes.c_int, _FloatP, _FloatP, _FloatP, _FloatP],
    ctypes.c_bool,
)
_SDL_WriteSurfacePixel = bind(
    "SDL_WriteSurfacePixel",
    [_SurfaceP, ctypes.c_int, ctypes.c_int, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8],
    ctypes.c_bool,
)
_SDL_WriteSurfacePixelFloat = bind(
    "SDL_WriteSurfacePixelFloat",
    [_SurfaceP, ctypes.c_int, ctypes.c_int, ctypes.c_float, ctypes.c_float, ctypes.c_float, ctypes.c_float],
    ctypes.c_bool,
)


def _rect(rect: Rect | None) -> Any:
    return None if rect is None else ctypes.byref(rect)


@dataclass
class SurfaceProperties:
    """
    Surface properties.
    """

    #: For HDR10 and floating point surfaces, the value of 100% diffuse white.
    sdr_white_point: float | None = None
    #: For HDR10 and floating point surfaces, the maximum dynamic range used by the content.
    hdr_headroom: float | None = None
    #: The tone mapping operator, "chrome", "*=N" or "none".
    tonemap_operator: str | None = None
    #: The hotspot pixel offset, if this surface is being used as a cursor.
    hotspot_x: int | None = None
    hotspot_y: int | None = None

    SDR_WHITE_POINT_FLOAT = "SDL.surface.SDR_white_point"
    HDR_HEADROOM_FLOAT = "SDL.surface.HDR_headroom"
    TONEMAP_OPERATOR_STRING = "SDL.surface.tonemap"
    HOTSPOT_X_NUMBER = "SDL.surface.hotspot.x"
    HOTSPOT_Y_NUMBER = "SDL.surface.hotspot.y"

    @classmethod
    def from_group(cls, group: properties.Group) -> Self:
        def optional(name: str, getter: Any) -> Any:
            return getter(name) if group.has(name) else None

        return cls(
            sdr_white_point=optional(cls.SDR_WHITE_POINT_FLOAT, group.get_float),
            hdr_headroom=optional(cls.HDR_HEADROOM_FLOAT, group.get_float),
            tonemap_operator=group.get_string(cls.TONEMAP_OPERATOR_STRING),
            hotspot_x=optional(cls.HOTSPOT_X_NUMBER, group.get_number),
            hotspot_y=optional(cls.HOTSPOT_Y_NUMBER, group.get_number),
        )

    def apply(self, group: properties.Group) -> None:
        """
        Write the set fields into the group. Unset fields are left untouched.
        """
        if self.sdr_white_point is not None:
            group.set(self.SDR_WHITE_POINT_FLOAT, float(self.sdr_white_point))
        if self.hdr_headroom is not None:
            group.set(self.HDR_HEADROOM_FLOAT, float(self.hdr_headroom))
        if self.tonemap_operator is not None:
            group.set(self.TONEMAP_OPERATOR_STRING, self.tonemap_operator)
        if self.hotspot_x is not None:
            group.set(self.HOTSPOT_X_NUMBER, int(self.hotspot_x))
        if self.hotspot_y is not None:
            group.set(self.HOTSPOT_Y_NUMBER, int(self.hotspot_y))


class Surface(AbstractContextManager["Surface"]):
    """
    A collection of pixels used in software blitting (SDL_Surface).
    """

    __slots__ = ("_keepalive", "pointer")

    def __init__(self, pointer: ctypes._Pointer[_Surface], keepalive: Any = None) -> None:
        self.pointer = pointer
        self._keepalive = keepalive

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if not self.pointer:
            return "<Surface destroyed>"
        return f"<Surface {self.width}x{self.height} {pixels.get_pixel_format_name(self.format)}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Surface):
            return NotImplemented
        return ctypes.cast(self.pointer, ctypes.c_void_p).value == ctypes.cast(other.pointer, ctypes.c_void_p).value

    def __hash__(self) -> int:
        return hash(ctypes.cast(self.pointer, ctypes.c_void_p).value)

    @classmethod
    def create(cls, width: int, height: int, format: PixelFormat) -> Self:
        """
        Allocate a new surface with a specific pixel format.

        The pixels of the new surface are initialized to zero.
        """
        return cls(errors.check_null(_SDL_CreateSurface(width, height, format)))

    @classmethod
    def create_from(cls, width: int, height: int, format: PixelFormat, data: Buffer, pitch: int) -> Self:
        """
        Allocate a new surface with a specific pixel format and existing pixel data.

        No copy is made of the pixel data. The buffer is kept alive by the surface handle.
        """
        view = memoryview(data)
        if view.readonly:
            raise ValueError("Surface pixels must be writable")
        if view.nbytes < pitch * height:
            raise ValueError("Buffer is too small for the given pitch and height")

        area = (ctypes.c_char * view.nbytes).from_buffer(view)
        return cls(errors.check_null(_SDL_CreateSurfaceFrom(width, height, format, area, pitch)), (view, area))

    @classmethod
    def load_bmp(cls, path: str | PathLike[str]) -> Self:
        """
        Load a BMP image from a file.
        """
        return cls(errors.check_null(_SDL_LoadBMP(fspath(path).encode("utf-8"))))

    @classmethod
    def load_bmp_io(cls, stream: Stream, close_io: bool = False) -> Self:
        """
        Load a BMP image from a seekable stream.

        :param close_io: Close the stream before returning, even on error.
        """
        with stream._handed_over(close_io) as src:
            return cls(errors.check_null(_SDL_LoadBMP_IO(src, close_io)))

    def save_bmp(self, path: str | PathLike[str]) -> None:
        errors.check_bool(_SDL_SaveBMP(self.pointer, fspath(path).encode("utf-8")))

    def save_bmp_io(self, stream: Stream, close_io: bool = False) -> None:
        with stream._handed_over(close_io) as dst:
            errors.check_bool(_SDL_SaveBMP_IO(self.pointer, dst, close_io))

    def destroy(self) -> None:
        """
        Drop the reference held by this handle.

        The surface is freed once the last reference is gone.
        """
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _SurfaceP()
        _SDL_DestroySurface(pointer)
        self._keepalive = None

    def increment_ref_count(self) -> Surface:
        """
        :return: A new handle owning an additional reference.
        """
        self.pointer.contents.refcount += 1
        return Surface(self.pointer, self._keepalive)

    @property
    def ref_count(self) -> int:
        return self.pointer.contents.refcount

    @property
    def flags(self) -> SurfaceFlags:
        return SurfaceFlags(self.pointer.contents.flags)

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
    def pitch(self) -> int:
        return self.pointer.contents.pitch

    @property
    def pixels(self) -> int | None:
        """
        The address of the pixel memory.
        """
        return self.pointer.contents.pixels

    def must_lock(self) -> bool:
        """
        Whether the surface needs to be locked before accessing the pixels.
        """
        return bool(self.pointer.contents.flags & SurfaceFlags.LOCK_NEEDED)

    def lock(self) -> None:
        errors.check_bool(_SDL_LockSurface(self.pointer))

    def unlock(self) -> None:
        _SDL_UnlockSurface(self.pointer)

    @contextmanager
    def locked(self) -> Iterator[Self]:
        """
        Keeps the surface locked within the block.
        """
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    def as_array(self) -> np.ndarray[Any, np.dtype[np.uint8]]:
        """
        A numpy view of the pixels with shape (height, width, bytes per pixel).

        Padding at the end of each row is excluded from the view.

        :raises ValueError: For FourCC formats and formats with less than 8 bits per pixel.
        """
        fmt = self.format
        bpp = pixels.bytes_per_pixel(fmt)
        if pixels.is_fourcc(fmt) or pixels.bits_per_pixel(fmt) < 8:
            raise ValueError(f"Cannot map {pixels.get_pixel_format_name(fmt)} to an array")

        address = self.pixels
        if not address:
            raise ValueError("The surface has no pixels")

        height, pitch = self.height, self.pitch
        raw = np.ctypeslib.as_array(ctypes.cast(address, _U8P), shape=(height * pitch,))
        return np.ndarray(shape=(height, self.width, bpp), dtype=np.uint8, buffer=raw, strides=(pitch, bpp, 1))

    def get_properties(self) -> SurfaceProperties:
        return SurfaceProperties.from_group(self.properties)

    def set_properties(self, props: SurfaceProperties) -> None:
        props.apply(self.properties)

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetSurfaceProperties(self.pointer)))

    def set_colorspace(self, colorspace: Colorspace) -> None:
        errors.check_bool(_SDL_SetSurfaceColorspace(self.pointer, colorspace))

    def get_colorspace(self) -> Colorspace:
        """
        :return: The colorspace. Defaults to SRGB for RGB surfaces and BT709_LIMITED for YUV surfaces.
        """
        return Colorspace(_SDL_GetSurfaceColorspace(self.pointer))

    def create_palette(self) -> Palette:
        """
        Create a palette and associate it with the surface.

        The palette is owned by the surface and must not be destroyed by the caller.
        """
        return Palette(errors.check_null(_SDL_CreateSurfacePalette(self.pointer)))

    def set_palette(self, palette: Palette) -> None:
        errors.check_bool(_SDL_SetSurfacePalette(self.pointer, palette.pointer))

    def get_palette(self) -> Palette | None:
        pointer = _SDL_GetSurfacePalette(self.pointer)
        return Palette(pointer) if pointer else None

    def add_alternate_image(self, image: Surface) -> None:
        """
        Add an alternate version of the surface, used for high DPI representations.

        A reference is added to the image. The caller keeps its own reference.
        """
        errors.check_bool(_SDL_AddSurfaceAlternateImage(self.pointer, image.pointer))

    def has_alternate_images(self) -> bool:
        return bool(_SDL_SurfaceHasAlternateImages(self.pointer))

    def get_images(self) -> list[Surface]:
        """
        Get an array including all versions of a surface.

        The returned handles do not own a reference, so they must not be destroyed.
        """
        count = ctypes.c_int()
        array = errors.check_null(_SDL_GetSurfaceImages(self.pointer, ctypes.byref(count)))
        return [Surface(pointer) for pointer in stdinc.take_array(array, count.value)]

    def remove_alternate_images(self) -> None:
        _SDL_RemoveSurfaceAlternateImages(self.pointer)

    def set_rle(self, enabled: bool) -> None:
        """
        If RLE is enabled, color key and alpha blending blits are much faster, but the surface must be locked before directly accessing the pixels.
        """
        errors.check_bool(_SDL_SetSurfaceRLE(self.pointer, enabled))

    def has_rle(self) -> bool:
        return bool(_SDL_SurfaceHasRLE(self.pointer))

    def set_color_key(self, key: int | None) -> None:
        """
        Set the transparent pixel value.

        :param key: The pixel value, or None to disable the color key.
        """
        errors.check_bool(_SDL_SetSurfaceColorKey(self.pointer, key is not None, key or 0))

    def has_color_key(self) -> bool:
        return bool(_SDL_SurfaceHasColorKey(self.pointer))

    def get_color_key(self) -> int | None:
        """
        :return: The color key, or None if the surface has none.
        """
        if not self.has_color_key():
            return None
        key = ctypes.c_uint32()
        errors.check_bool(_SDL_GetSurfaceColorKey(self.pointer, ctypes.byref(key)))
        return key.value

    def set_color_mod(self, r: int, g: int, b: int) -> None:
        """
        Set an additional color value multiplied into blit operations.
        """
        errors.check_bool(_SDL_SetSurfaceColorMod(self.pointer, r, g, b))

    def get_color_mod(self) -> tuple[int, int, int]:
        r, g, b = ctypes.c_uint8(), ctypes.c_uint8(), ctypes.c_uint8()
        errors.check_bool(_SDL_GetSurfaceColorMod(self.pointer, ctypes.byref(r), ctypes.byref(g), ctypes.byref(b)))
        return r.value, g.value, b.value

    def set_alpha_mod(self, alpha: int) -> None:
        errors.check_bool(_SDL_SetSurfaceAlphaMod(self.pointer, alpha))

    def get_alpha_mod(self) -> int:
        alpha = ctypes.c_uint8()
        errors.check_bool(_SDL_GetSurfaceAlphaMod(self.pointer, ctypes.byref(alpha)))
        return alpha.value

    def set_blend_mode(self, mode: BlendMode | int) -> None:
        errors.check_bool(_SDL_SetSurfaceBlendMode(self.pointer, mode))

    def get_blend_mode(self) -> BlendMode | int:
        mode = ctypes.c_uint32()
        errors.check_bool(_SDL_GetSurfaceBlendMode(self.pointer, ctypes.byref(mode)))
        return to_blend_mode(mode.value)

    def set_clip_rect(self, rect: Rect | None) -> bool:
        """
        Set the clipping rectangle for the surface.

        :param rect: The clipping rectangle, or None to disable clipping.
        :return: Whether the rectangle intersects the surface. Blits are fully clipped otherwise.
        """
        return bool(_SDL_SetSurfaceClipRect(self.pointer, _rect(rect)))

    def get_clip_rect(self) -> Rect:
        rect = Rect()
        errors.check_bool(_SDL_GetSurfaceClipRect(self.pointer, ctypes.byref(rect)))
        return rect

    def flip(self, mode: FlipMode) -> None:
        """
        Flip the surface in place.
        """
        errors.check_bool(_SDL_FlipSurface(self.pointer, mode))

    def duplicate(self) -> Surface:
        """
        Creates a new surface identical to the existing surface, including alternate images.
        """
        return Surface(errors.check_null(_SDL_DuplicateSurface(self.pointer)))

    def scale(self, width: int, height: int, mode: ScaleMode = ScaleMode.LINEAR) -> Surface:
        """
        Creates a new surface with the contents scaled to the given size.
        """
        return Surface(errors.check_null(_SDL_ScaleSurface(self.pointer, width, height, mode)))

    def convert(self, format: PixelFormat) -> Surface:
        """
        Copy the surface to a new surface of the specified format.
        """
        return Surface(errors.check_null(_SDL_ConvertSurface(self.pointer, format)))

    def convert_and_colorspace(
        self,
        format: PixelFormat,
        colorspace: Colorspace,
        palette: Palette | None = None,
        props: properties.Group | None = None,
    ) -> Surface:
        """
        Copy the surface to a new surface of the specified format and colorspace.
        """
        return Surface(
            errors.check_null(
                _SDL_ConvertSurfaceAndColorspace(
                    self.pointer,
                    format,
                    None if palette is None else palette.pointer,
                    colorspace,
                    0 if props is None else props.value,
                )
            )
        )

    def premultiply_alpha(self, linear: bool = False) -> None:
        """
        Premultiply the alpha in the surface in place.

        :param linear: Convert from sRGB to linear space for the alpha multiplication.
        """
        errors.check_bool(_SDL_PremultiplySurfaceAlpha(self.pointer, linear))

    def clear(self, r: float, g: float, b: float, a: float) -> None:
        """
        Clear the surface with a specific color, with floating point precision.

        This ignores the clip rectangle.
        """
        errors.check_bool(_SDL_ClearSurface(self.pointer, r, g, b, a))

    def fill_rect(self, rect: Rect | None, color: int) -> None:
        """
        Perform a fast fill of a rectangle with a specific color.

        :param rect: The area to fill, or None to fill the entire surface.
        :param color: The pixel value, see map_rgb().
        """
        errors.check_bool(_SDL_FillSurfaceRect(self.pointer, _rect(rect), color))

    def fill_rects(self, rects: Sequence[Rect], color: int) -> None:
        array = (Rect * len(rects))(*rects)
        errors.check_bool(_SDL_FillSurfaceRects(self.pointer, array, len(rects), color))

    def blit(self, src_rect: Rect | None, dst: Surface, dst_rect: Rect | None) -> None:
        """
        Performs a fast blit from this surface to the destination surface.

        Only the position of dst_rect is used, the width and height are ignored.
        """
        errors.check_bool(_SDL_BlitSurface(self.pointer, _rect(src_rect), dst.pointer, _rect(dst_rect)))

    def blit_unchecked(self, src_rect: Rect, dst: Surface, dst_rect: Rect) -> None:
        """
        Perform low-level surface blitting only.

        This function performs no clipping.
        """
        errors.check_bool(
            _SDL_BlitSurfaceUnchecked(self.pointer, ctypes.byref(src_rect), dst.pointer, ctypes.byref(dst_rect))
        )

    def blit_scaled(
        self, src_rect: Rect | None, dst: Surface, dst_rect: Rect | None, mode: ScaleMode = ScaleMode.LINEAR
    ) -> None:
        """
        Perform a scaled blit to a destination surface, which may be of a different format.
        """
        errors.check_bool(_SDL_BlitSurfaceScaled(self.pointer, _rect(src_rect), dst.pointer, _rect(dst_rect), mode))

    def blit_unchecked_scaled(self, src_rect: Rect, dst: Surface, dst_rect: Rect, mode: ScaleMode) -> None:
        errors.check_bool(
            _SDL_BlitSurfaceUncheckedScaled(
                self.pointer, ctypes.byref(src_rect), dst.pointer, ctypes.byref(dst_rect), mode
            )
        )

    def stretch(self, src_rect: Rect | None, dst: Surface, dst_rect: Rect | None, mode: ScaleMode) -> None:
        """
        Perform a stretched pixel copy from one surface to another.
        """
        errors.check_bool(_SDL_StretchSurface(self.pointer, _rect(src_rect), dst.pointer, _rect(dst_rect), mode))

    def blit_tiled(self, src_rect: Rect | None, dst: Surface, dst_rect: Rect | None) -> None:
        """
        Perform a tiled blit, filling dst_rect with copies of the source.
        """
        errors.check_bool(_SDL_BlitSurfaceTiled(self.pointer, _rect(src_rect), dst.pointer, _rect(dst_rect)))

    def blit_tiled_with_scale(
        self, src_rect: Rect | None, scale: float, mode: ScaleMode, dst: Surface, dst_rect: Rect | None
    ) -> None:
        errors.check_bool(
            _SDL_BlitSurfaceTiledWithScale(
                self.pointer, _rect(src_rect), scale, mode, dst.pointer, _rect(dst_rect)
            )
        )

    def blit_9grid(
        self,
        src_rect: Rect | None,
        left_width: int,
        right_width: int,
        top_height: int,
        bottom_height: int,
        scale: float,
        mode: ScaleMode,
        dst: Surface,
        dst_rect: Rect | None,
    ) -> None:
        """
        Perform a scaled blit using the 9-grid algorithm.

        The corners are drawn unscaled, the edges and center are stretched to fill dst_rect.
        """
        errors.check_bool(
            _SDL_BlitSurface9Grid(
                self.pointer,
                _rect(src_rect),
                left_width,
                right_width,
                top_height,
                bottom_height,
                scale,
                mode,
                dst.pointer,
                _rect(dst_rect),
            )
        )

    def map_rgb(self, r: int, g: int, b: int) -> int:
        """
        Map an RGB triple to an opaque pixel value for the surface.
        """
        return _SDL_MapSurfaceRGB(self.pointer, r, g, b)

    def map_rgba(self, r: int, g: int, b: int, a: int) -> int:
        return _SDL_MapSurfaceRGBA(self.pointer, r, g, b, a)

    def read_pixel(self, x: int, y: int) -> Color:
        """
        Retrieves a single pixel from the surface.
        """
        channels = [ctypes.c_uint8() for _ in range(4)]
        errors.check_bool(_SDL_ReadSurfacePixel(self.pointer, x, y, *map(ctypes.byref, channels)))
        return Color(*(c.value for c in channels))

    def read_pixel_float(self, x: int, y: int) -> tuple[float, float, float, float]:
        channels = [ctypes.c_float() for _ in range(4)]
        errors.check_bool(_SDL_ReadSurfacePixelFloat(self.pointer, x, y, *map(ctypes.byref, channels)))
        r, g, b, a = (c.value for c in channels)
        return r, g, b, a

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """
        Writes a single pixel to the surface.
        """
        errors.check_bool(_SDL_WriteSurfacePixel(self.pointer, x, y, color.r, color.g, color.b, color.a))

    def write_pixel_float(self, x: int, y: int, r: float, g: float, b: float, a: float) -> None:
        errors.check_bool(_SDL_WriteSurfacePixelFloat(self.pointer, x, y, r, g, b, a))


def _pixel_area(data: Buffer, writable: bool) -> tuple[Any, Any]:
    view = memoryview(data)
    if writable and view.readonly:
        raise ValueError("The destination buffer must be writable")
    if view.readonly:
        area = ctypes.create_string_buffer(view.tobytes(), view.nbytes)
    else:
        area = (ctypes.c_char * view.nbytes).from_buffer(view)
    return view, area


def convert_pixels(
    width: int,
    height: int,
    src_format: PixelFormat,
    src: Buffer,
    src_pitch: int,
    dst_format: PixelFormat,
    dst: Buffer,
    dst_pitch: int,
) -> None:
    """
    Copy a block of pixels of one format to another format.
    """
    _, src_area = _pixel_area(src, False)
    _, dst_area = _pixel_area(dst, True)
    errors.check_bool(
        _SDL_ConvertPixels(width, height, src_format, src_area, src_pitch, dst_format, dst_area, dst_pitch)
    )


def convert_pixels_and_colorspace(
    width: int,
    height: int,
    src_format: PixelFormat,
    src_colorspace: Colorspace,
    src: Buffer,
    src_pitch: int,
    dst_format: PixelFormat,
    dst_colorspace: Colorspace,
    dst: Buffer,
    dst_pitch: int,
    src_properties: properties.Group | None = None,
    dst_properties: properties.Group | None = None,
) -> None:
    """
    Copy a block of pixels of one format and colorspace to another format and colorspace.
    """
    _, src_area = _pixel_area(src, False)
    _, dst_area = _pixel_area(dst, True)
    errors.check_bool(
        _SDL_ConvertPixelsAndColorspace(
            width,
            height,
            src_format,
            src_colorspace,
            0 if src_properties is None else src_properties.value,
            src_area,
            src_pitch,
            dst_format,
            dst_colorspace,
            0 if dst_properties is None else dst_properties.value,
            dst_area,
            dst_pitch,
        )
    )


def premultiply_alpha(
    width: int,
    height: int,
    src_format: PixelFormat,
    src: Buffer,
    src_pitch: int,
    dst_format: PixelFormat,
    dst: Buffer,
    dst_pitch: int,
    linear: bool = False,
) -> None:
    """
    Premultiply the alpha on a block of pixels.

    This is safe to use with src == dst, but not for other overlapping areas.
    """
    _, src_area = _pixel_area(src, False)
    _, dst_area = _pixel_area(dst, True)
    errors.check_bool(
        _SDL_PremultiplyAlpha(width, height, src_format, src_area, src_pitch, dst_format, dst_area, dst_pitch, linear)
    )
