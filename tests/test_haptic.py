# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for force feedback effects."""

import ctypes
from collections.abc import Iterator

import pytest

from sdlengine import haptic
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.errors import SdlError
from sdlengine.haptic import (
    HAPTIC_INFINITY,
    ConditionEffect,
    ConditionKind,
    ConstantEffect,
    CustomEffect,
    Direction,
    DirectionType,
    Effect,
    Envelope,
    Features,
    Haptic,
    LeftRightEffect,
    NativeEffect,
    PeriodicEffect,
    RampEffect,
    Waveform,
)
from sdlengine.init import InitFlags, subsystems


def convert(effect: Effect) -> Effect | None:
    return haptic.effect_from_sdl(effect.to_sdl())


class TestLayout:
    def test_direction(self) -> None:
        assert ctypes.sizeof(haptic._Direction) == 16

    @pytest.mark.skipif(ctypes.sizeof(ctypes.c_void_p) != 8, reason="64-bit layout")
    def test_effect_union(self) -> None:
        assert ctypes.sizeof(NativeEffect) == 72


class TestEffects:
    def test_constant(self) -> None:
        effect = ConstantEffect(
            direction=Direction(DirectionType.CARTESIAN, (1, 0, 0)),
            length=1000,
            level=0x4000,
            envelope=Envelope(attack_length=100, attack_level=0x1000),
        )
        assert convert(effect) == effect

    def test_constant_native_type(self) -> None:
        assert ConstantEffect().to_sdl().type == Features.CONSTANT

    def test_infinite_length(self) -> None:
        native = ConstantEffect(length=None).to_sdl()
        assert native.constant.length == HAPTIC_INFINITY
        assert convert(ConstantEffect(length=None)) == ConstantEffect(length=None)

    def test_periodic(self) -> None:
        effect = PeriodicEffect(
            waveform=Waveform.TRIANGLE,
            direction=Direction(DirectionType.POLAR, (18000, 0, 0)),
            length=5000,
            delay=10,
            period=250,
            magnitude=-0x2000,
            offset=12,
            phase=9000,
            envelope=Envelope(fade_length=500, fade_level=0),
        )
        native = effect.to_sdl()
        assert native.type == Features.TRIANGLE
        assert convert(effect) == effect

    def test_condition(self) -> None:
        effect = ConditionEffect(
            kind=ConditionKind.FRICTION,
            length=2000,
            right_sat=(0xFFFF, 0xFFFF, 0),
            left_sat=(0xFFFF, 0, 0),
            right_coeff=(0x2000, -0x2000, 0),
            left_coeff=(0x2000, 0, 0),
            deadband=(10, 20, 30),
            center=(-1, 0, 1),
        )
        native = effect.to_sdl()
        assert native.type == Features.FRICTION
        assert convert(effect) == effect

    def test_ramp(self) -> None:
        effect = RampEffect(length=300, start=-0x7FFF, end=0x7FFF)
        assert convert(effect) == effect

    def test_left_right(self) -> None:
        effect = LeftRightEffect(length=500, large_magnitude=0xFFFF, small_magnitude=0x8000)
        native = effect.to_sdl()
        assert native.type == Features.LEFTRIGHT
        assert convert(effect) == effect

    def test_custom(self) -> None:
        effect = CustomEffect(channels=2, period=20, length=100, data=(1, 2, 3, 4, 5, 6))
        assert effect.samples == 3

        native = effect.to_sdl()
        assert native.custom.samples == 3
        converted = haptic.effect_from_sdl(native)
        assert isinstance(converted, CustomEffect)
        assert tuple(converted.data) == (1, 2, 3, 4, 5, 6)

    def test_custom_requires_whole_samples(self) -> None:
        with pytest.raises(ValueError):
            CustomEffect(channels=2, data=(1, 2, 3)).to_sdl()

    def test_unknown_type(self) -> None:
        native = NativeEffect()
        native.type = Features.GAIN
        assert haptic.effect_from_sdl(native) is None


def test_waveforms_match_feature_bits() -> None:
    assert Waveform.SINE == Features.SINE
    assert Waveform.SAWTOOTHDOWN == Features.SAWTOOTHDOWN
    assert ConditionKind.FRICTION == Features.FRICTION


@requires_library
class TestNativeHaptic:
    @pytest.fixture(autouse=True)
    def haptic_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.HAPTIC):
            yield

    def test_enumeration(self) -> None:
        assert isinstance(haptic.get_haptics(), list)
        assert isinstance(haptic.is_mouse_haptic(), bool)

    def test_open_invalid(self) -> None:
        with pytest.raises(SdlError):
            Haptic.open(0xFFFFFF)

    def test_gain_is_validated(self) -> None:
        device = Haptic(haptic._HapticP())
        with pytest.raises(SdlError):
            device.set_gain(101)
        with pytest.raises(SdlError):
            device.set_autocenter(-1)

    def test_close_null_is_noop(self) -> None:
        Haptic(haptic._HapticP()).close()
