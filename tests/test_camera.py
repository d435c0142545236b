# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the camera module."""

import ctypes

from sdlengine import camera
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.camera import CameraSpec
from sdlengine.init import InitFlags, subsystems
from sdlengine.pixels import Colorspace, PixelFormat


class TestCameraSpec:
    def test_layout(self) -> None:
        assert ctypes.sizeof(camera._CameraSpec) == 24

    def test_round_trip(self) -> None:
        spec = CameraSpec(PixelFormat.YUY2, Colorspace.BT709_LIMITED, 1280, 720, 30000, 1001)
        assert CameraSpec.from_sdl(spec.to_sdl()) == spec

    def test_unknown_format(self) -> None:
        native = CameraSpec(None, None, 640, 480, 30).to_sdl()
        assert native.format == PixelFormat.UNKNOWN
        assert native.colorspace == Colorspace.UNKNOWN
        spec = CameraSpec.from_sdl(native)
        assert spec.format is None
        assert spec.colorspace is None

    def test_framerate(self) -> None:
        assert CameraSpec(None, None, 640, 480, 60).framerate == 60.0
        assert CameraSpec(None, None, 640, 480, 30000, 1001).framerate == 30000 / 1001


@requires_library
def test_dummy_driver_has_no_cameras() -> None:
    with use_dummy_drivers(), subsystems(InitFlags.CAMERA):
        assert camera.get_current_driver() == "dummy"
        assert camera.get_cameras() == []
