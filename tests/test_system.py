# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the small system query modules."""

import sys
from collections.abc import Iterator

import pytest

from sdlengine import clipboard, cpu_info, locale, platform, power, system
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.blend_mode import BlendFactor, BlendMode, BlendOperation, compose_custom, to_blend_mode
from sdlengine.init import InitFlags, subsystems


def test_to_blend_mode() -> None:
    assert to_blend_mode(1) is BlendMode.BLEND
    assert to_blend_mode(0x12345) == 0x12345


def test_locale_str() -> None:
    assert str(locale.Locale("en")) == "en"
    assert str(locale.Locale("en", "CA")) == "en_CA"


def test_platform_flags() -> None:
    assert platform.windows == (sys.platform in ("win32", "cygwin"))
    assert platform.unix != platform.windows or platform.emscripten


@requires_library
class TestNativeQueries:
    def test_platform_name(self) -> None:
        name = platform.get()
        if platform.linux:
            assert name == "Linux"
        elif platform.macos:
            assert name == "macOS"
        elif platform.windows:
            assert name == "Windows"

    def test_compose_custom(self) -> None:
        mode = compose_custom(
            BlendFactor.SRC_ALPHA,
            BlendFactor.ONE_MINUS_SRC_ALPHA,
            BlendOperation.ADD,
            BlendFactor.ONE,
            BlendFactor.ZERO,
            BlendOperation.ADD,
        )
        assert mode != BlendMode.INVALID

    def test_cpu_info(self) -> None:
        assert cpu_info.get_num_logical_cores() >= 1
        assert cpu_info.get_cache_line_size() > 0
        assert cpu_info.get_system_ram() > 0
        assert cpu_info.get_simd_alignment() >= 1
        assert isinstance(cpu_info.has_sse2(), bool)

    def test_power(self) -> None:
        info = power.get_info()
        assert info.state != power.PowerState.ERROR
        assert info.percent is None or 0 <= info.percent <= 100

    def test_locales(self) -> None:
        for preferred in locale.get_preferred():
            assert preferred.language

    def test_system(self) -> None:
        assert isinstance(system.is_tablet(), bool)
        assert system.get_sandbox() != system.Sandbox.NONE


@requires_library
class TestClipboard:
    @pytest.fixture(autouse=True)
    def video_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.VIDEO):
            yield

    def test_text(self) -> None:
        clipboard.set_text("hello")
        assert clipboard.has_text()
        assert clipboard.get_text() == "hello"

    def test_data(self) -> None:
        requested: list[str] = []

        def provide(mime_type: str) -> bytes | None:
            requested.append(mime_type)
            return b"payload"

        clipboard.set_data(provide, ["application/x-sdlengine"])
        try:
            assert clipboard.has_data("application/x-sdlengine")
            assert "application/x-sdlengine" in clipboard.get_mime_types()
            assert clipboard.get_data("application/x-sdlengine") == b"payload"
            assert "application/x-sdlengine" in requested
        finally:
            clipboard.clear_data()
        assert not clipboard.has_data("application/x-sdlengine")
