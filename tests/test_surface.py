# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the surface module."""

from collections.abc import Iterator
from pathlib import Path

import numpy as np
import pytest

from sdlengine import surface
from sdlengine._testutils import requires_library
from sdlengine.pixels import Color, PixelFormat
from sdlengine.rect import Rect
from sdlengine.surface import Surface, SurfaceProperties


def test_destroyed_surface() -> None:
    handle = Surface(surface._SurfaceP())
    assert repr(handle) == "<Surface destroyed>"
    handle.destroy()


def test_create_from_rejects_readonly_buffer() -> None:
    with pytest.raises(ValueError):
        Surface.create_from(2, 2, PixelFormat.RGBA8888, bytes(16), 8)


def test_create_from_rejects_short_buffer() -> None:
    with pytest.raises(ValueError):
        Surface.create_from(2, 2, PixelFormat.RGBA8888, bytearray(8), 8)


@requires_library
class TestNativeSurface:
    @pytest.fixture
    def rgba(self) -> Iterator[Surface]:
        with Surface.create(4, 3, PixelFormat.RGBA8888) as handle:
            yield handle

    def test_properties(self, rgba: Surface) -> None:
        assert (rgba.width, rgba.height) == (4, 3)
        assert rgba.format == PixelFormat.RGBA8888
        assert rgba.pitch >= 16
        assert repr(rgba) == "<Surface 4x3 SDL_PIXELFORMAT_RGBA8888>"

    def test_pixels_start_zeroed(self, rgba: Surface) -> None:
        assert rgba.read_pixel(0, 0) == Color(0, 0, 0, 0)

    def test_write_read_pixel(self, rgba: Surface) -> None:
        rgba.write_pixel(1, 2, Color(10, 20, 30, 40))
        assert rgba.read_pixel(1, 2) == Color(10, 20, 30, 40)

    def test_fill_rect(self, rgba: Surface) -> None:
        rgba.fill_rect(Rect(1, 1, 2, 1), rgba.map_rgba(255, 0, 0, 255))
        assert rgba.read_pixel(1, 1) == Color(255, 0, 0, 255)
        assert rgba.read_pixel(2, 1) == Color(255, 0, 0, 255)
        assert rgba.read_pixel(3, 1) == Color(0, 0, 0, 0)

    def test_blit(self, rgba: Surface) -> None:
        with Surface.create(4, 3, PixelFormat.RGBA8888) as dst:
            rgba.fill_rect(None, rgba.map_rgba(0, 255, 0, 255))
            rgba.blit(None, dst, None)
            assert dst.read_pixel(3, 2) == Color(0, 255, 0, 255)

    def test_create_from_shares_memory(self) -> None:
        data = bytearray(16)
        with Surface.create_from(2, 2, PixelFormat.RGBA8888, data, 8) as handle:
            handle.fill_rect(None, handle.map_rgba(1, 2, 3, 4))
        assert data != bytearray(16)

    def test_as_array(self, rgba: Surface) -> None:
        rgba.fill_rect(None, rgba.map_rgba(9, 9, 9, 9))
        array = rgba.as_array()
        assert array.shape == (3, 4, 4)
        assert np.all(array == 9)
        array[0, 0] = 0
        assert rgba.read_pixel(0, 0) == Color(0, 0, 0, 0)

    def test_as_array_rejects_packed_bits(self) -> None:
        with Surface.create(8, 1, PixelFormat.INDEX1LSB) as handle, pytest.raises(ValueError):
            handle.as_array()

    def test_convert(self, rgba: Surface) -> None:
        rgba.write_pixel(0, 0, Color(1, 2, 3, 255))
        with rgba.convert(PixelFormat.XRGB8888) as converted:
            assert converted.format == PixelFormat.XRGB8888
            assert converted.read_pixel(0, 0) == Color(1, 2, 3, 255)

    def test_duplicate(self, rgba: Surface) -> None:
        rgba.write_pixel(0, 0, Color(5, 5, 5, 5))
        with rgba.duplicate() as copy:
            assert copy != rgba
            assert copy.read_pixel(0, 0) == Color(5, 5, 5, 5)

    def test_bmp_round_trip(self, rgba: Surface, tmp_path: Path) -> None:
        rgba.write_pixel(2, 1, Color(50, 60, 70, 255))
        path = tmp_path / "image.bmp"
        rgba.save_bmp(path)
        with Surface.load_bmp(path) as loaded:
            assert (loaded.width, loaded.height) == (4, 3)
            assert loaded.read_pixel(2, 1) == Color(50, 60, 70, 255)

    def test_properties_round_trip(self, rgba: Surface) -> None:
        assert rgba.get_properties() == SurfaceProperties()
        rgba.set_properties(SurfaceProperties(tonemap_operator="none", hotspot_x=2, hotspot_y=1))
        props = rgba.get_properties()
        assert props.tonemap_operator == "none"
        assert (props.hotspot_x, props.hotspot_y) == (2, 1)
        assert props.sdr_white_point is None

    def test_destroy_twice(self) -> None:
        handle = Surface.create(1, 1, PixelFormat.RGBA8888)
        handle.destroy()
        handle.destroy()
        assert not handle.pointer
