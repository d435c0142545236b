# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.pixels describes pixel formats and colorspaces.

SDL packs the description of a pixel format into a single 32-bit value:

    flag(4) | type(4) | order(4) | layout(4) | bits per pixel(8) | bytes per pixel(8)

FourCC formats (YUV and friends) store four ASCII characters instead. The
functions of this module decode these values the same way SDL's header
macros do, so they are usable without the native library.

Colorspaces are packed similarly:

    type(4) | range(4) | chroma(4) | primaries(10) | transfer(5) | matrix(5)

Only the format names, the conversion between masks and formats and
color mapping call into SDL.
"""

from __future__ import annotations

import ctypes
import sys
from collections.abc import Sequence
from enum import IntEnum
from typing import NamedTuple, Self

from . import errors
from ._dll import bind

__all__ = [
    "ALPHA_OPAQUE",
    "ALPHA_OPAQUE_FLOAT",
    "ALPHA_TRANSPARENT",
    "ALPHA_TRANSPARENT_FLOAT",
    "ArrayOrder",
    "BitmapOrder",
    "ChromaLocation",
    "Color",
    "ColorPrimaries",
    "ColorRange",
    "ColorType",
    "Colorspace",
    "FColor",
    "Masks",
    "MatrixCoefficients",
    "PackedLayout",
    "PackedOrder",
    "Palette",
    "PixelFormat",
    "PixelFormatDetails",
    "PixelType",
    "TransferCharacteristics",
    "bits_per_pixel",
    "bytes_per_pixel",
    "colorspace_chroma",
    "colorspace_matrix",
    "colorspace_primaries",
    "colorspace_range",
    "colorspace_transfer",
    "colorspace_type",
    "define_colorspace",
    "define_fourcc",
    "define_pixel_format",
    "get_details",
    "get_masks",
    "get_pixel_format_for_masks",
    "get_pixel_format_name",
    "get_rgb",
    "get_rgba",
    "has_alpha",
    "is_10bit",
    "is_array",
    "is_float",
    "is_fourcc",
    "is_full_range",
    "is_indexed",
    "is_limited_range",
    "is_matrix_bt601",
    "is_matrix_bt709",
    "is_matrix_bt2020_ncl",
    "is_packed",
    "map_rgb",
    "map_rgba",
    "pixel_flag",
    "pixel_layout",
    "pixel_order",
    "pixel_type",
]


ALPHA_OPAQUE = 255
ALPHA_TRANSPARENT = 0
ALPHA_OPAQUE_FLOAT = 1.0
ALPHA_TRANSPARENT_FLOAT = 0.0


class PixelType(IntEnum):
    UNKNOWN = 0
    INDEX1 = 1
    INDEX4 = 2
    INDEX8 = 3
    PACKED8 = 4
    PACKED16 = 5
    PACKED32 = 6
    ARRAYU8 = 7
    ARRAYU16 = 8
    ARRAYU32 = 9
    ARRAYF16 = 10
    ARRAYF32 = 11
    INDEX2 = 12


class BitmapOrder(IntEnum):
    """
    Bitmap pixel order, high bit to low bit.
    """

    NONE = 0
    ORDER_4321 = 1
    ORDER_1234 = 2


class PackedOrder(IntEnum):
    """
    Packed component order, high bit to low bit.
    """

    NONE = 0
    XRGB = 1
    RGBX = 2
    ARGB = 3
    RGBA = 4
    XBGR = 5
    BGRX = 6
    ABGR = 7
    BGRA = 8


class ArrayOrder(IntEnum):
    """
    Array component order, low byte to high byte.
    """

    NONE = 0
    RGB = 1
    RGBA = 2
    ARGB = 3
    BGR = 4
    BGRA = 5
    ABGR = 6


class PackedLayout(IntEnum):
    NONE = 0
    LAYOUT_332 = 1
    LAYOUT_4444 = 2
    LAYOUT_1555 = 3
    LAYOUT_5551 = 4
    LAYOUT_565 = 5
    LAYOUT_8888 = 6
    LAYOUT_2101010 = 7
    LAYOUT_1010102 = 8


def define_pixel_format(type: int, order: int, layout: int, bits: int, bytes: int) -> int:
    return (1 << 28) | (type << 24) | (order << 20) | (layout << 16) | (bits << 8) | bytes


def define_fourcc(code: str | bytes) -> int:
    """
    Packs four ASCII characters into a FourCC value.
    """
    raw = code.encode("ascii") if isinstance(code, str) else code
    if len(raw) != 4:
        raise ValueError("A FourCC consists of exactly four characters")
    return raw[0] | (raw[1] << 8) | (raw[2] << 16) | (raw[3] << 24)


class PixelFormat(IntEnum):
    """
    Pixel format.

    The RGBA32, ARGB32, BGRA32 and ABGR32 aliases (and their X-variants) refer
    to the format with the given byte order in memory on the running platform.
    """

    UNKNOWN = 0
    INDEX1LSB = 0x11100100
    INDEX1MSB = 0x11200100
    INDEX2LSB = 0x1C100200
    INDEX2MSB = 0x1C200200
    INDEX4LSB = 0x12100400
    INDEX4MSB = 0x12200400
    INDEX8 = 0x13000801
    RGB332 = 0x14110801
    XRGB4444 = 0x15120C02
    XBGR4444 = 0x15520C02
    XRGB1555 = 0x15130F02
    XBGR1555 = 0x15530F02
    ARGB4444 = 0x15321002
    RGBA4444 = 0x15421002
    ABGR4444 = 0x15721002
    BGRA4444 = 0x15821002
    ARGB1555 = 0x15331002
    RGBA5551 = 0x15441002
    ABGR1555 = 0x15731002
    BGRA5551 = 0x15841002
    RGB565 = 0x15151002
    BGR565 = 0x15551002
    RGB24 = 0x17101803
    BGR24 = 0x17401803
    XRGB8888 = 0x16161804
    RGBX8888 = 0x16261804
    XBGR8888 = 0x16561804
    BGRX8888 = 0x16661804
    ARGB8888 = 0x16362004
    RGBA8888 = 0x16462004
    ABGR8888 = 0x16762004
    BGRA8888 = 0x16862004
    XRGB2101010 = 0x16172004
    XBGR2101010 = 0x16572004
    ARGB2101010 = 0x16372004
    ABGR2101010 = 0x16772004
    RGB48 = 0x18103006
    BGR48 = 0x18403006
    RGBA64 = 0x18204008
    ARGB64 = 0x18304008
    BGRA64 = 0x18504008
    ABGR64 = 0x18604008
    RGB48_FLOAT = 0x1A103006
    BGR48_FLOAT = 0x1A403006
    RGBA64_FLOAT = 0x1A204008
    ARGB64_FLOAT = 0x1A304008
    BGRA64_FLOAT = 0x1A504008
    ABGR64_FLOAT = 0x1A604008
    RGB96_FLOAT = 0x1B10600C
    BGR96_FLOAT = 0x1B40600C
    RGBA128_FLOAT = 0x1B208010
    ARGB128_FLOAT = 0x1B308010
    BGRA128_FLOAT = 0x1B508010
    ABGR128_FLOAT = 0x1B608010

    #: Planar mode: Y + V + U (3 planes)
    YV12 = 0x32315659
    #: Planar mode: Y + U + V (3 planes)
    IYUV = 0x56555949
    #: Packed mode: Y0+U0+Y1+V0 (1 plane)
    YUY2 = 0x32595559
    #: Packed mode: U0+Y0+V0+Y1 (1 plane)
    UYVY = 0x59565955
    #: Packed mode: Y0+V0+Y1+U0 (1 plane)
    YVYU = 0x55595659
    #: Planar mode: Y + U/V interleaved (2 planes)
    NV12 = 0x3231564E
    #: Planar mode: Y + V/U interleaved (2 planes)
    NV21 = 0x3132564E
    #: Planar mode: Y + U/V interleaved (2 planes)
    P010 = 0x30313050
    #: Android video texture format
    EXTERNAL_OES = 0x2053454F
    #: Motion JPEG
    MJPG = 0x47504A4D

    if sys.byteorder == "big":
        RGBA32 = RGBA8888
        ARGB32 = ARGB8888
        BGRA32 = BGRA8888
        ABGR32 = ABGR8888
        RGBX32 = RGBX8888
        XRGB32 = XRGB8888
        BGRX32 = BGRX8888
        XBGR32 = XBGR8888
    else:
        RGBA32 = ABGR8888
        ARGB32 = BGRA8888
        BGRA32 = ARGB8888
        ABGR32 = RGBA8888
        RGBX32 = XBGR8888
        XRGB32 = BGRX8888
        BGRX32 = XRGB8888
        XBGR32 = RGBX8888


_FOURCC_TWO_BYTES = (PixelFormat.YUY2, PixelFormat.UYVY, PixelFormat.YVYU, PixelFormat.P010)


def pixel_flag(fmt: int) -> int:
    return (fmt >> 28) & 0x0F


def pixel_type(fmt: int) -> int:
    return (fmt >> 24) & 0x0F


def pixel_order(fmt: int) -> int:
    return (fmt >> 20) & 0x0F


def pixel_layout(fmt: int) -> int:
    return (fmt >> 16) & 0x0F


def is_fourcc(fmt: int) -> bool:
    """
    FourCC formats are all formats whose flag is not 1.
    """
    return fmt != 0 and pixel_flag(fmt) != 1


def bits_per_pixel(fmt: int) -> int:
    """
    FourCC formats report 0 bits per pixel.
    """
    return 0 if is_fourcc(fmt) else (fmt >> 8) & 0xFF


def bytes_per_pixel(fmt: int) -> int:
    """
    For FourCC formats, this is the number of bytes per pixel of the first plane.
    """
    if is_fourcc(fmt):
        return 2 if fmt in _FOURCC_TWO_BYTES else 1
    return fmt & 0xFF


def is_indexed(fmt: int) -> bool:
    return not is_fourcc(fmt) and pixel_type(fmt) in (
        PixelType.INDEX1,
        PixelType.INDEX2,
        PixelType.INDEX4,
        PixelType.INDEX8,
    )


def is_packed(fmt: int) -> bool:
    return not is_fourcc(fmt) and pixel_type(fmt) in (PixelType.PACKED8, PixelType.PACKED16, PixelType.PACKED32)


def is_array(fmt: int) -> bool:
    return not is_fourcc(fmt) and pixel_type(fmt) in (
        PixelType.ARRAYU8,
        PixelType.ARRAYU16,
        PixelType.ARRAYU32,
        PixelType.ARRAYF16,
        PixelType.ARRAYF32,
    )


def is_10bit(fmt: int) -> bool:
    return (
        not is_fourcc(fmt)
        and pixel_type(fmt) == PixelType.PACKED32
        and pixel_layout(fmt) == PackedLayout.LAYOUT_2101010
    )


def is_float(fmt: int) -> bool:
    return not is_fourcc(fmt) and pixel_type(fmt) in (PixelType.ARRAYF16, PixelType.ARRAYF32)


def has_alpha(fmt: int) -> bool:
    if is_packed(fmt):
        return pixel_order(fmt) in (PackedOrder.ARGB, PackedOrder.RGBA, PackedOrder.ABGR, PackedOrder.BGRA)
    if is_array(fmt):
        return pixel_order(fmt) in (ArrayOrder.ARGB, ArrayOrder.RGBA, ArrayOrder.ABGR, ArrayOrder.BGRA)
    return False


class ColorType(IntEnum):
    UNKNOWN = 0
    RGB = 1
    YCBCR = 2


class ColorRange(IntEnum):
    UNKNOWN = 0
    #: Narrow range, e.g. 16-235 for 8-bit RGB and luma, and 16-240 for 8-bit chroma
    LIMITED = 1
    #: Full range, e.g. 0-255 for 8-bit RGB and luma, and 1-255 for 8-bit chroma
    FULL = 2


class ColorPrimaries(IntEnum):
    """
    Colorspace color primaries, as described by ITU-T H.273.
    """

    UNKNOWN = 0
    BT709 = 1
    UNSPECIFIED = 2
    BT470M = 4
    BT470BG = 5
    BT601 = 6
    SMPTE240 = 7
    GENERIC_FILM = 8
    BT2020 = 9
    XYZ = 10
    SMPTE431 = 11
    SMPTE432 = 12
    EBU3213 = 22
    CUSTOM = 31


class TransferCharacteristics(IntEnum):
    """
    Colorspace transfer characteristics, as described by ITU-T H.273.
    """

    UNKNOWN = 0
    BT709 = 1
    UNSPECIFIED = 2
    GAMMA22 = 4
    GAMMA28 = 5
    BT601 = 6
    SMPTE240 = 7
    LINEAR = 8
    LOG100 = 9
    LOG100_SQRT10 = 10
    IEC61966 = 11
    BT1361 = 12
    SRGB = 13
    BT2020_10BIT = 14
    BT2020_12BIT = 15
    PQ = 16
    SMPTE428 = 17
    HLG = 18
    CUSTOM = 31


class MatrixCoefficients(IntEnum):
    """
    Colorspace matrix coefficients, as described by ITU-T H.273.
    """

    IDENTITY = 0
    BT709 = 1
    UNSPECIFIED = 2
    FCC = 4
    BT470BG = 5
    BT601 = 6
    SMPTE240 = 7
    YCGCO = 8
    BT2020_NCL = 9
    BT2020_CL = 10
    SMPTE2085 = 11
    CHROMA_DERIVED_NCL = 12
    CHROMA_DERIVED_CL = 13
    ICTCP = 14
    CUSTOM = 31


class ChromaLocation(IntEnum):
    """
    Colorspace chroma sample location.
    """

    #: RGB, no chroma sampling
    NONE = 0
    #: In MPEG-2, MPEG-4, and AVC, Cb and Cr are taken on midpoint of the left-edge of the 2x2 square.
    LEFT = 1
    #: In JPEG/JFIF, H.261, and MPEG-1, Cb and Cr are taken at the center of the 2x2 square.
    CENTER = 2
    #: In HEVC for BT.2020 and BT.2100 content (in particular on Blu-rays), Cb and Cr are sampled at the same location as the group's top-left Y pixel.
    TOPLEFT = 3


def define_colorspace(
    type: int, range: int, primaries: int, transfer: int, matrix: int, chroma: int
) -> int:
    return (type << 28) | (range << 24) | (chroma << 20) | (primaries << 10) | (transfer << 5) | matrix


class Colorspace(IntEnum):
    UNKNOWN = 0
    #: Equivalent to DXGI_COLOR_SPACE_RGB_FULL_G22_NONE_P709
    SRGB = 0x120005A0
    #: Equivalent to DXGI_COLOR_SPACE_RGB_FULL_G10_NONE_P709
    SRGB_LINEAR = 0x12000500
    #: Equivalent to DXGI_COLOR_SPACE_RGB_FULL_G2084_NONE_P2020
    HDR10 = 0x12002600
    #: Equivalent to DXGI_COLOR_SPACE_YCBCR_FULL_G22_NONE_P709_X601
    JPEG = 0x220004C6
    BT601_LIMITED = 0x211018C6
    BT601_FULL = 0x221018C6
    BT709_LIMITED = 0x21100421
    BT709_FULL = 0x22100421
    BT2020_LIMITED = 0x21102609
    BT2020_FULL = 0x22102609

    #: The default colorspace for RGB surfaces if no colorspace is specified
    RGB_DEFAULT = SRGB
    #: The default colorspace for YUV surfaces if no colorspace is specified
    YUV_DEFAULT = BT601_LIMITED


def colorspace_type(cs: int) -> int:
    return (cs >> 28) & 0x0F


def colorspace_range(cs: int) -> int:
    return (cs >> 24) & 0x0F


def colorspace_chroma(cs: int) -> int:
    return (cs >> 20) & 0x0F


def colorspace_primaries(cs: int) -> int:
    return (cs >> 10) & 0x1F


def colorspace_transfer(cs: int) -> int:
    return (cs >> 5) & 0x1F


def colorspace_matrix(cs: int) -> int:
    return cs & 0x1F


def is_matrix_bt601(cs: int) -> bool:
    return colorspace_matrix(cs) in (MatrixCoefficients.BT601, MatrixCoefficients.BT470BG)


def is_matrix_bt709(cs: int) -> bool:
    return colorspace_matrix(cs) == MatrixCoefficients.BT709


def is_matrix_bt2020_ncl(cs: int) -> bool:
    return colorspace_matrix(cs) == MatrixCoefficients.BT2020_NCL


def is_limited_range(cs: int) -> bool:
    return colorspace_range(cs) != ColorRange.FULL


def is_full_range(cs: int) -> bool:
    return colorspace_range(cs) == ColorRange.FULL


class Color(ctypes.Structure):
    """
    A structure that represents a color as RGBA components.
    """

    _fields_ = [("r", ctypes.c_uint8), ("g", ctypes.c_uint8), ("b", ctypes.c_uint8), ("a", ctypes.c_uint8)]

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a


class FColor(ctypes.Structure):
    """
    A structure that represents a color as floating point RGBA components, usually in the range 0-1.
    """

    _fields_ = [("r", ctypes.c_float), ("g", ctypes.c_float), ("b", ctypes.c_float), ("a", ctypes.c_float)]

    def __repr__(self) -> str:
        return f"FColor({self.r}, {self.g}, {self.b}, {self.a})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FColor):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.r, self.g, self.b, self.a


class PixelFormatDetails(ctypes.Structure):
    """
    Details about the format of a pixel (SDL_PixelFormatDetails).
    """

    _fields_ = [
        ("format", ctypes.c_int),
        ("bits_per_pixel", ctypes.c_uint8),
        ("bytes_per_pixel", ctypes.c_uint8),
        ("padding", ctypes.c_uint8 * 2),
        ("Rmask", ctypes.c_uint32),
        ("Gmask", ctypes.c_uint32),
        ("Bmask", ctypes.c_uint32),
        ("Amask", ctypes.c_uint32),
        ("Rbits", ctypes.c_uint8),
        ("Gbits", ctypes.c_uint8),
        ("Bbits", ctypes.c_uint8),
        ("Abits", ctypes.c_uint8),
        ("Rshift", ctypes.c_uint8),
        ("Gshift", ctypes.c_uint8),
        ("Bshift", ctypes.c_uint8),
        ("Ashift", ctypes.c_uint8),
    ]


class _Palette(ctypes.Structure):
    _fields_ = [
        ("ncolors", ctypes.c_int),
        ("colors", ctypes.POINTER(Color)),
        ("version", ctypes.c_uint32),
        ("refcount", ctypes.c_int),
    ]


_PaletteP = ctypes.POINTER(_Palette)
_DetailsP = ctypes.POINTER(PixelFormatDetails)
_U8P = ctypes.POINTER(ctypes.c_uint8)
_U32P = ctypes.POINTER(ctypes.c_uint32)

_SDL_GetPixelFormatName = bind("SDL_GetPixelFormatName", [ctypes.c_int], ctypes.c_char_p)
_SDL_GetMasksForPixelFormat = bind(
    "SDL_GetMasksForPixelFormat",
    [ctypes.c_int, ctypes.POINTER(ctypes.c_int), _U32P, _U32P, _U32P, _U32P],
    ctypes.c_bool,
)
_SDL_GetPixelFormatForMasks = bind(
    "SDL_GetPixelFormatForMasks",
    [ctypes.c_int, ctypes.c_uint32, ctypes.c_uint32, ctypes.c_uint32, ctypes.c_uint32],
    ctypes.c_int,
)
_SDL_GetPixelFormatDetails = bind("SDL_GetPixelFormatDetails", [ctypes.c_int], _DetailsP)
_SDL_CreatePalette = bind("SDL_CreatePalette", [ctypes.c_int], _PaletteP)
_SDL_SetPaletteColors = bind(
    "SDL_SetPaletteColors", [_PaletteP, ctypes.POINTER(Color), ctypes.c_int, ctypes.c_int], ctypes.c_bool
)
_SDL_DestroyPalette = bind("SDL_DestroyPalette", [_PaletteP], None)
_SDL_MapRGB = bind(
    "SDL_MapRGB", [_DetailsP, _PaletteP, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8], ctypes.c_uint32
)
_SDL_MapRGBA = bind(
    "SDL_MapRGBA",
    [_DetailsP, _PaletteP, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8],
    ctypes.c_uint32,
)
_SDL_GetRGB = bind("SDL_GetRGB", [ctypes.c_uint32, _DetailsP, _PaletteP, _U8P, _U8P, _U8P], None)
_SDL_GetRGBA = bind("SDL_GetRGBA", [ctypes.c_uint32, _DetailsP, _PaletteP, _U8P, _U8P, _U8P, _U8P], None)


class Masks(NamedTuple):
    bpp: int
    r: int
    g: int
    b: int
    a: int


def get_pixel_format_name(fmt: int) -> str:
    """
    :return: The human readable name, or "SDL_PIXELFORMAT_UNKNOWN" if the format isn't recognized.
    """
    return _SDL_GetPixelFormatName(fmt).decode("utf-8")


def get_masks(fmt: int) -> Masks:
    """
    Convert one of the enumerated pixel formats to a bpp value and RGBA masks.
    """
    bpp = ctypes.c_int()
    masks = [ctypes.c_uint32() for _ in range(4)]
    errors.check_bool(_SDL_GetMasksForPixelFormat(fmt, ctypes.byref(bpp), *map(ctypes.byref, masks)))
    return Masks(bpp.value, *(m.value for m in masks))


def get_pixel_format_for_masks(bpp: int, r: int, g: int, b: int, a: int) -> PixelFormat:
    """
    :return: The matching format, or PixelFormat.UNKNOWN if there isn't a match.
    """
    return PixelFormat(_SDL_GetPixelFormatForMasks(bpp, r, g, b, a))


def get_details(fmt: int) -> PixelFormatDetails:
    """
    Create a PixelFormatDetails structure corresponding to a pixel format.

    The returned structure is a copy, SDL keeps its own cached version.
    """
    pointer = errors.check_null(_SDL_GetPixelFormatDetails(fmt))
    return PixelFormatDetails.from_buffer_copy(pointer.contents)


class Palette:
    """
    A set of indexed colors representing a palette (SDL_Palette).

    SDL reference counts palettes. Surfaces hold on to the palettes assigned to them.
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Palette]) -> None:
        self.pointer = pointer

    @classmethod
    def create(cls, num_colors: int) -> Self:
        """
        The palette entries are initialized to white.
        """
        return cls(errors.check_null(_SDL_CreatePalette(num_colors)))

    def destroy(self) -> None:
        _SDL_DestroyPalette(self.pointer)

    def __len__(self) -> int:
        return self.pointer.contents.ncolors

    def __getitem__(self, index: int) -> Color:
        if not 0 <= index < len(self):
            raise IndexError(index)
        src = self.pointer.contents.colors[index]
        return Color(src.r, src.g, src.b, src.a)

    @property
    def colors(self) -> list[Color]:
        return [self[i] for i in range(len(self))]

    @property
    def version(self) -> int:
        return self.pointer.contents.version

    def set_colors(self, colors: Sequence[Color], first: int = 0) -> None:
        """
        Set a range of colors in a palette.
        """
        array = (Color * len(colors))(*colors)
        errors.check_bool(_SDL_SetPaletteColors(self.pointer, array, first, len(colors)))


def _details(fmt: int | PixelFormatDetails) -> ctypes._Pointer[PixelFormatDetails]:
    if isinstance(fmt, PixelFormatDetails):
        return ctypes.pointer(fmt)
    return errors.check_null(_SDL_GetPixelFormatDetails(fmt))


def _palette(palette: Palette | None) -> ctypes._Pointer[_Palette] | None:
    return None if palette is None else palette.pointer


def map_rgb(fmt: int | PixelFormatDetails, r: int, g: int, b: int, palette: Palette | None = None) -> int:
    """
    Map an RGB triple to an opaque pixel value for a given pixel format.
    """
    return _SDL_MapRGB(_details(fmt), _palette(palette), r, g, b)


def map_rgba(fmt: int | PixelFormatDetails, r: int, g: int, b: int, a: int, palette: Palette | None = None) -> int:
    """
    Map an RGBA quadruple to a pixel value for a given pixel format.
    """
    return _SDL_MapRGBA(_details(fmt), _palette(palette), r, g, b, a)


def get_rgb(pixel: int, fmt: int | PixelFormatDetails, palette: Palette | None = None) -> tuple[int, int, int]:
    """
    Get RGB values from a pixel in the specified format.
    """
    r, g, b = ctypes.c_uint8(), ctypes.c_uint8(), ctypes.c_uint8()
    _SDL_GetRGB(pixel, _details(fmt), _palette(palette), ctypes.byref(r), ctypes.byref(g), ctypes.byref(b))
    return r.value, g.value, b.value


def get_rgba(pixel: int, fmt: int | PixelFormatDetails, palette: Palette | None = None) -> Color:
    """
    Get RGBA values from a pixel in the specified format.
    """
    channels = [ctypes.c_uint8() for _ in range(4)]
    _SDL_GetRGBA(pixel, _details(fmt), _palette(palette), *map(ctypes.byref, channels))
    return Color(*(c.value for c in channels))
