# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the pixel format and colorspace helpers."""

import pytest

from sdlengine import pixels
from sdlengine._testutils import requires_library
from sdlengine.pixels import (
    ArrayOrder,
    ChromaLocation,
    Color,
    ColorPrimaries,
    ColorRange,
    Colorspace,
    ColorType,
    FColor,
    MatrixCoefficients,
    PackedLayout,
    PackedOrder,
    PixelFormat,
    PixelType,
    TransferCharacteristics,
)


class TestPixelFormat:
    def test_define_pixel_format(self) -> None:
        value = pixels.define_pixel_format(PixelType.PACKED32, PackedOrder.RGBA, PackedLayout.LAYOUT_8888, 32, 4)
        assert value == PixelFormat.RGBA8888 == 0x16462004

        value = pixels.define_pixel_format(PixelType.ARRAYU8, ArrayOrder.RGB, PackedLayout.NONE, 24, 3)
        assert value == PixelFormat.RGB24

    def test_define_fourcc(self) -> None:
        assert pixels.define_fourcc("YUY2") == PixelFormat.YUY2 == 0x32595559
        assert pixels.define_fourcc(b"NV12") == PixelFormat.NV12

    def test_define_fourcc_requires_four_characters(self) -> None:
        with pytest.raises(ValueError):
            pixels.define_fourcc("YUV")

    def test_fields(self) -> None:
        fmt = PixelFormat.RGBA8888
        assert pixels.pixel_flag(fmt) == 1
        assert pixels.pixel_type(fmt) == PixelType.PACKED32
        assert pixels.pixel_order(fmt) == PackedOrder.RGBA
        assert pixels.pixel_layout(fmt) == PackedLayout.LAYOUT_8888

    def test_sizes(self) -> None:
        assert pixels.bits_per_pixel(PixelFormat.RGBA8888) == 32
        assert pixels.bytes_per_pixel(PixelFormat.RGBA8888) == 4
        assert pixels.bits_per_pixel(PixelFormat.RGB565) == 16
        assert pixels.bytes_per_pixel(PixelFormat.RGB565) == 2
        assert pixels.bytes_per_pixel(PixelFormat.RGB24) == 3
        assert pixels.bytes_per_pixel(PixelFormat.RGBA128_FLOAT) == 16

    def test_fourcc_sizes(self) -> None:
        assert pixels.is_fourcc(PixelFormat.YUY2)
        assert pixels.bits_per_pixel(PixelFormat.YUY2) == 0
        assert pixels.bytes_per_pixel(PixelFormat.YUY2) == 2
        assert pixels.bytes_per_pixel(PixelFormat.NV12) == 1

    def test_unknown_is_not_fourcc(self) -> None:
        assert not pixels.is_fourcc(PixelFormat.UNKNOWN)

    def test_classification(self) -> None:
        assert pixels.is_indexed(PixelFormat.INDEX8)
        assert not pixels.is_indexed(PixelFormat.RGB565)

        assert pixels.is_packed(PixelFormat.RGB565)
        assert not pixels.is_packed(PixelFormat.RGB24)

        assert pixels.is_array(PixelFormat.RGB24)
        assert not pixels.is_array(PixelFormat.YUY2)

        assert pixels.is_10bit(PixelFormat.ARGB2101010)
        assert not pixels.is_10bit(PixelFormat.ARGB8888)

        assert pixels.is_float(PixelFormat.RGBA128_FLOAT)
        assert not pixels.is_float(PixelFormat.RGBA64)

    def test_has_alpha(self) -> None:
        assert pixels.has_alpha(PixelFormat.RGBA8888)
        assert pixels.has_alpha(PixelFormat.RGBA128_FLOAT)
        assert not pixels.has_alpha(PixelFormat.XRGB8888)
        assert not pixels.has_alpha(PixelFormat.RGB24)
        assert not pixels.has_alpha(PixelFormat.YUY2)

    def test_byte_order_aliases(self) -> None:
        assert PixelFormat.RGBA32 in (PixelFormat.RGBA8888, PixelFormat.ABGR8888)


class TestColorspace:
    def test_define_srgb(self) -> None:
        value = pixels.define_colorspace(
            ColorType.RGB,
            ColorRange.FULL,
            ColorPrimaries.BT709,
            TransferCharacteristics.SRGB,
            MatrixCoefficients.IDENTITY,
            ChromaLocation.NONE,
        )
        assert value == Colorspace.SRGB == 0x120005A0

    def test_define_bt709_limited(self) -> None:
        value = pixels.define_colorspace(
            ColorType.YCBCR,
            ColorRange.LIMITED,
            ColorPrimaries.BT709,
            TransferCharacteristics.BT709,
            MatrixCoefficients.BT709,
            ChromaLocation.LEFT,
        )
        assert value == Colorspace.BT709_LIMITED == 0x21100421

    def test_fields(self) -> None:
        cs = Colorspace.BT2020_FULL
        assert pixels.colorspace_type(cs) == ColorType.YCBCR
        assert pixels.colorspace_range(cs) == ColorRange.FULL
        assert pixels.colorspace_primaries(cs) == ColorPrimaries.BT2020
        assert pixels.colorspace_transfer(cs) == TransferCharacteristics.PQ
        assert pixels.colorspace_matrix(cs) == MatrixCoefficients.BT2020_NCL
        assert pixels.colorspace_chroma(cs) == ChromaLocation.LEFT

    def test_matrix_predicates(self) -> None:
        assert pixels.is_matrix_bt601(Colorspace.BT601_LIMITED)
        assert pixels.is_matrix_bt709(Colorspace.BT709_FULL)
        assert pixels.is_matrix_bt2020_ncl(Colorspace.BT2020_LIMITED)
        assert not pixels.is_matrix_bt709(Colorspace.BT601_FULL)

    def test_range_predicates(self) -> None:
        assert pixels.is_limited_range(Colorspace.BT709_LIMITED)
        assert pixels.is_full_range(Colorspace.JPEG)
        assert not pixels.is_full_range(Colorspace.BT601_LIMITED)

    def test_defaults(self) -> None:
        assert Colorspace.RGB_DEFAULT == Colorspace.SRGB
        assert Colorspace.YUV_DEFAULT == Colorspace.BT601_LIMITED


class TestColor:
    def test_color(self) -> None:
        assert Color(1, 2, 3, 4).as_tuple() == (1, 2, 3, 4)
        assert Color(1, 2, 3, 4) == Color(1, 2, 3, 4)
        assert Color(1, 2, 3, 4) != Color(1, 2, 3, 5)

    def test_fcolor(self) -> None:
        assert FColor(0.5, 0.25, 1.0, 0.0).as_tuple() == (0.5, 0.25, 1.0, 0.0)
        assert FColor(0.5, 0.5, 0.5, 1.0) == FColor(0.5, 0.5, 0.5, 1.0)


@requires_library
class TestNativePixels:
    def test_format_name(self) -> None:
        assert pixels.get_pixel_format_name(PixelFormat.RGBA8888) == "SDL_PIXELFORMAT_RGBA8888"
        assert pixels.get_pixel_format_name(0x12345678) == "SDL_PIXELFORMAT_UNKNOWN"

    def test_masks_round_trip(self) -> None:
        masks = pixels.get_masks(PixelFormat.RGBA8888)
        assert masks == (32, 0xFF000000, 0x00FF0000, 0x0000FF00, 0x000000FF)
        assert pixels.get_pixel_format_for_masks(*masks) == PixelFormat.RGBA8888

    def test_details(self) -> None:
        details = pixels.get_details(PixelFormat.RGB565)
        assert details.bits_per_pixel == 16
        assert details.bytes_per_pixel == 2

    def test_map_rgba(self) -> None:
        pixel = pixels.map_rgba(PixelFormat.RGBA8888, 1, 2, 3, 4)
        assert pixel == 0x01020304
        assert pixels.get_rgba(pixel, PixelFormat.RGBA8888) == Color(1, 2, 3, 4)

    def test_palette(self) -> None:
        palette = pixels.Palette.create(4)
        try:
            palette.set_colors([Color(255, 0, 0, 255), Color(0, 255, 0, 255)], first=1)
            assert len(palette) == 4
            assert palette[1] == Color(255, 0, 0, 255)
            assert palette[2] == Color(0, 255, 0, 255)
        finally:
            palette.destroy()
