# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the render module."""

import ctypes
from collections.abc import Iterator

import pytest

from sdlengine import render
from sdlengine._testutils import requires_library
from sdlengine.pixels import Color, FColor, PixelFormat
from sdlengine.rect import FPoint, FRect, Rect
from sdlengine.render import Renderer, TextureAccess, Vertex
from sdlengine.surface import Surface


def test_vertex_layout() -> None:
    assert ctypes.sizeof(Vertex) == 32
    vertex = Vertex(FPoint(1, 2), FColor(1, 0, 0, 1), FPoint(0, 0))
    assert vertex.position == FPoint(1, 2)


def test_destroyed_renderer() -> None:
    renderer = Renderer(render._RendererP())
    assert repr(renderer) == "<Renderer destroyed>"
    renderer.destroy()


@requires_library
class TestSoftwareRenderer:
    @pytest.fixture
    def target(self) -> Iterator[Surface]:
        with Surface.create(8, 8, PixelFormat.RGBA8888) as target:
            yield target

    @pytest.fixture
    def renderer(self, target: Surface) -> Iterator[Renderer]:
        with Renderer.create_software(target) as renderer:
            yield renderer

    def test_name(self, renderer: Renderer) -> None:
        assert renderer.name == render.SOFTWARE_RENDERER
        assert render.SOFTWARE_RENDERER in render.get_drivers()

    def test_draw_color(self, renderer: Renderer) -> None:
        renderer.set_draw_color(1, 2, 3, 4)
        assert renderer.get_draw_color() == Color(1, 2, 3, 4)

    def test_clear(self, renderer: Renderer, target: Surface) -> None:
        renderer.set_draw_color(255, 0, 0)
        renderer.clear()
        renderer.flush()
        assert target.read_pixel(7, 7) == Color(255, 0, 0, 255)

    def test_fill_rect(self, renderer: Renderer, target: Surface) -> None:
        renderer.set_draw_color(0, 0, 255)
        renderer.render_fill_rect(FRect(0, 0, 2, 2))
        renderer.flush()
        assert target.read_pixel(1, 1) == Color(0, 0, 255, 255)
        assert target.read_pixel(2, 2) == Color(0, 0, 0, 0)

    def test_read_pixels(self, renderer: Renderer) -> None:
        renderer.set_draw_color(0, 255, 0)
        renderer.clear()
        with renderer.read_pixels(Rect(0, 0, 2, 2)) as pixels:
            assert (pixels.width, pixels.height) == (2, 2)
            assert pixels.read_pixel(0, 0) == Color(0, 255, 0, 255)

    def test_viewport(self, renderer: Renderer) -> None:
        renderer.set_viewport(Rect(1, 1, 4, 4))
        assert renderer.get_viewport() == Rect(1, 1, 4, 4)
        assert renderer.viewport_set()
        renderer.set_viewport(None)
        assert renderer.get_viewport() == Rect(0, 0, 8, 8)

    def test_texture(self, renderer: Renderer) -> None:
        with renderer.create_texture(PixelFormat.RGBA8888, TextureAccess.STREAMING, 4, 2) as texture:
            assert (texture.width, texture.height) == (4, 2)
            assert texture.format == PixelFormat.RGBA8888
            assert texture.renderer == renderer
            texture.set_alpha_mod(128)
            assert texture.get_alpha_mod() == 128

    def test_texture_lock(self, renderer: Renderer) -> None:
        with renderer.create_texture(PixelFormat.RGBA8888, TextureAccess.STREAMING, 4, 2) as texture:
            with texture.locked() as (view, pitch):
                assert pitch >= 16
                assert len(view) >= pitch * 2

    def test_render_target(self, renderer: Renderer) -> None:
        with renderer.create_texture(PixelFormat.RGBA8888, TextureAccess.TARGET, 4, 4) as texture:
            with renderer.rendering_to(texture):
                assert renderer.target == texture
            assert renderer.target is None
