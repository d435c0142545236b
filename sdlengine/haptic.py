# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Force feedback ("haptic") support.

Effects are described with the immutable effect types of this module
(ConstantEffect, PeriodicEffect, ConditionEffect, RampEffect,
LeftRightEffect and CustomEffect) and uploaded to a device:

    >>> with Haptic.from_joystick(joystick) as haptic:
    ...     effect = haptic.create_effect(PeriodicEffect(length=5000, period=1000, magnitude=0x4000))
    ...     haptic.run_effect(effect)

Directions are encoded like SDL does. Polar directions are hundredths of a
degree starting north and turning clockwise, so a force coming from the
south is Direction(DirectionType.POLAR, (18000, 0, 0)).

Time values are milliseconds. A length of None plays the effect forever.
"""

from __future__ import annotations

import ctypes
from collections.abc import Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from types import TracebackType
from typing import Self

from . import errors, stdinc
from ._dll import bind
from .joystick import Joystick, _JoystickP

__all__ = [
    "HAPTIC_INFINITY",
    "ConditionEffect",
    "ConditionKind",
    "ConstantEffect",
    "CustomEffect",
    "Direction",
    "DirectionType",
    "Effect",
    "Envelope",
    "Features",
    "Haptic",
    "LeftRightEffect",
    "NativeEffect",
    "PeriodicEffect",
    "RampEffect",
    "Waveform",
    "effect_from_sdl",
    "get_haptics",
    "get_name_for_id",
    "is_joystick_haptic",
    "is_mouse_haptic",
]


#: Used as the native length of effects that play forever.
HAPTIC_INFINITY = 4294967295


class Features(IntFlag):
    """
    Effect types and device capabilities (the SDL_HAPTIC_* bits).
    """

    CONSTANT = 1 << 0
    SINE = 1 << 1
    SQUARE = 1 << 2
    TRIANGLE = 1 << 3
    SAWTOOTHUP = 1 << 4
    SAWTOOTHDOWN = 1 << 5
    RAMP = 1 << 6
    SPRING = 1 << 7
    DAMPER = 1 << 8
    INERTIA = 1 << 9
    FRICTION = 1 << 10
    LEFTRIGHT = 1 << 11
    RESERVED1 = 1 << 12
    RESERVED2 = 1 << 13
    RESERVED3 = 1 << 14
    CUSTOM = 1 << 15
    GAIN = 1 << 16
    AUTOCENTER = 1 << 17
    STATUS = 1 << 18
    PAUSE = 1 << 19


class Waveform(IntEnum):
    SINE = Features.SINE
    SQUARE = Features.SQUARE
    TRIANGLE = Features.TRIANGLE
    SAWTOOTHUP = Features.SAWTOOTHUP
    SAWTOOTHDOWN = Features.SAWTOOTHDOWN


class ConditionKind(IntEnum):
    #: Based on the axes position.
    SPRING = Features.SPRING
    #: Based on the axes velocity.
    DAMPER = Features.DAMPER
    #: Based on the axes acceleration.
    INERTIA = Features.INERTIA
    #: Based on the axes movement.
    FRICTION = Features.FRICTION


class DirectionType(IntEnum):
    POLAR = 0
    CARTESIAN = 1
    SPHERICAL = 2
    #: Let SDL pick the steering wheel axis.
    STEERING_AXIS = 3


class _Direction(ctypes.Structure):
    _fields_ = [("type", ctypes.c_uint8), ("dir", ctypes.c_int32 * 3)]


_u16x3 = ctypes.c_uint16 * 3
_s16x3 = ctypes.c_int16 * 3

_HEADER = [
    ("type", ctypes.c_uint16),
    ("direction", _Direction),
    ("length", ctypes.c_uint32),
    ("delay", ctypes.c_uint16),
    ("button", ctypes.c_uint16),
    ("interval", ctypes.c_uint16),
]
_ENVELOPE = [
    ("attack_length", ctypes.c_uint16),
    ("attack_level", ctypes.c_uint16),
    ("fade_length", ctypes.c_uint16),
    ("fade_level", ctypes.c_uint16),
]


class _Constant(ctypes.Structure):
    _fields_ = [*_HEADER, ("level", ctypes.c_int16), *_ENVELOPE]


class _Periodic(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("period", ctypes.c_uint16),
        ("magnitude", ctypes.c_int16),
        ("offset", ctypes.c_int16),
        ("phase", ctypes.c_uint16),
        *_ENVELOPE,
    ]


class _Condition(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("right_sat", _u16x3),
        ("left_sat", _u16x3),
        ("right_coeff", _s16x3),
        ("left_coeff", _s16x3),
        ("deadband", _u16x3),
        ("center", _s16x3),
    ]


class _Ramp(ctypes.Structure):
    _fields_ = [*_HEADER, ("start", ctypes.c_int16), ("end", ctypes.c_int16), *_ENVELOPE]


class _LeftRight(ctypes.Structure):
    _fields_ = [
        ("type", ctypes.c_uint16),
        ("length", ctypes.c_uint32),
        ("large_magnitude", ctypes.c_uint16),
        ("small_magnitude", ctypes.c_uint16),
    ]


class _Custom(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("channels", ctypes.c_uint8),
        ("period", ctypes.c_uint16),
        ("samples", ctypes.c_uint16),
        ("data", ctypes.POINTER(ctypes.c_uint16)),
        *_ENVELOPE,
    ]


class NativeEffect(ctypes.Union):
    """
    The native SDL_HapticEffect union. The type field selects the member.
    """

    _fields_ = [
        ("type", ctypes.c_uint16),
        ("constant", _Constant),
        ("periodic", _Periodic),
        ("condition", _Condition),
        ("ramp", _Ramp),
        ("leftright", _LeftRight),
        ("custom", _Custom),
    ]


def _length_to_sdl(length: int | None) -> int:
    return HAPTIC_INFINITY if length is None else length


def _length_from_sdl(length: int) -> int | None:
    return None if length == HAPTIC_INFINITY else length


@dataclass(frozen=True, slots=True)
class Direction:
    """
    The direction a force comes from.
    """

    type: DirectionType = DirectionType.POLAR
    dir: tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def from_sdl(cls, value: _Direction) -> Self:
        return cls(DirectionType(value.type), (value.dir[0], value.dir[1], value.dir[2]))

    def to_sdl(self) -> _Direction:
        return _Direction(self.type, (ctypes.c_int32 * 3)(*self.dir))


@dataclass(frozen=True, slots=True)
class Envelope:
    """
    Fade-in and fade-out of an effect.

    The envelope is only used when attack_length or fade_level is set.
    """

    attack_length: int = 0
    attack_level: int = 0
    fade_length: int = 0
    fade_level: int = 0

    @classmethod
    def from_sdl(cls, value: _Constant | _Periodic | _Ramp | _Custom) -> Self:
        return cls(value.attack_length, value.attack_level, value.fade_length, value.fade_level)

    def fill(self, value: _Constant | _Periodic | _Ramp | _Custom) -> None:
        value.attack_length = self.attack_length
        value.attack_level = self.attack_level
        value.fade_length = self.fade_length
        value.fade_level = self.fade_level


@dataclass(frozen=True, slots=True, kw_only=True)
class _BaseEffect:
    direction: Direction = field(default_factory=Direction)
    #: Duration in milliseconds. None plays forever.
    length: int | None = None
    delay: int = 0
    #: Button that triggers the effect. Buttons start at index 1.
    button: int = 0
    #: How soon the button can trigger the effect again.
    interval: int = 0

    def _fill_header(self, value: _Constant | _Periodic | _Condition | _Ramp | _Custom, type: int) -> None:
        value.type = type
        value.direction = self.direction.to_sdl()
        value.length = _length_to_sdl(self.length)
        value.delay = self.delay
        value.button = self.button
        value.interval = self.interval

    @staticmethod
    def _header(value: _Constant | _Periodic | _Condition | _Ramp | _Custom) -> dict[str, object]:
        return {
            "direction": Direction.from_sdl(value.direction),
            "length": _length_from_sdl(value.length),
            "delay": value.delay,
            "button": value.button,
            "interval": value.interval,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class ConstantEffect(_BaseEffect):
    """
    A constant force in the given direction.
    """

    level: int = 0
    envelope: Envelope = field(default_factory=Envelope)

    @classmethod
    def from_sdl(cls, value: _Constant) -> Self:
        return cls(level=value.level, envelope=Envelope.from_sdl(value), **cls._header(value))  # type: ignore[arg-type]

    def to_sdl(self) -> NativeEffect:
        effect = NativeEffect()
        self._fill_header(effect.constant, Features.CONSTANT)
        effect.constant.level = self.level
        self.envelope.fill(effect.constant)
        return effect


@dataclass(frozen=True, slots=True, kw_only=True)
class PeriodicEffect(_BaseEffect):
    """
    A periodic wave.

    :ivar period: Period of the wave in milliseconds.
    :ivar phase: Horizontal shift in hundredths of a degree.
    """

    waveform: Waveform = Waveform.SINE
    period: int = 0
    magnitude: int = 0
    offset: int = 0
    phase: int = 0
    envelope: Envelope = field(default_factory=Envelope)

    @classmethod
    def from_sdl(cls, value: _Periodic) -> Self:
        return cls(
            waveform=Waveform(value.type),
            period=value.period,
            magnitude=value.magnitude,
            offset=value.offset,
            phase=value.phase,
            envelope=Envelope.from_sdl(value),
            **cls._header(value),  # type: ignore[arg-type]
        )

    def to_sdl(self) -> NativeEffect:
        effect = NativeEffect()
        self._fill_header(effect.periodic, self.waveform)
        effect.periodic.period = self.period
        effect.periodic.magnitude = self.magnitude
        effect.periodic.offset = self.offset
        effect.periodic.phase = self.phase
        self.envelope.fill(effect.periodic)
        return effect


@dataclass(frozen=True, slots=True, kw_only=True)
class ConditionEffect(_BaseEffect):
    """
    A condition effect. Each tuple holds the values for the X, Y and Z axes.

    The direction is handled by the condition values and not by the direction field.
    """

    kind: ConditionKind = ConditionKind.SPRING
    right_sat: tuple[int, int, int] = (0, 0, 0)
    left_sat: tuple[int, int, int] = (0, 0, 0)
    right_coeff: tuple[int, int, int] = (0, 0, 0)
    left_coeff: tuple[int, int, int] = (0, 0, 0)
    deadband: tuple[int, int, int] = (0, 0, 0)
    center: tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def from_sdl(cls, value: _Condition) -> Self:
        return cls(
            kind=ConditionKind(value.type),
            right_sat=tuple(value.right_sat),  # type: ignore[arg-type]
            left_sat=tuple(value.left_sat),  # type: ignore[arg-type]
            right_coeff=tuple(value.right_coeff),  # type: ignore[arg-type]
            left_coeff=tuple(value.left_coeff),  # type: ignore[arg-type]
            deadband=tuple(value.deadband),  # type: ignore[arg-type]
            center=tuple(value.center),  # type: ignore[arg-type]
            **cls._header(value),  # type: ignore[arg-type]
        )

    def to_sdl(self) -> NativeEffect:
        effect = NativeEffect()
        condition = effect.condition
        self._fill_header(condition, self.kind)
        condition.right_sat = _u16x3(*self.right_sat)
        condition.left_sat = _u16x3(*self.left_sat)
        condition.right_coeff = _s16x3(*self.right_coeff)
        condition.left_coeff = _s16x3(*self.left_coeff)
        condition.deadband = _u16x3(*self.deadband)
        condition.center = _s16x3(*self.center)
        return effect


@dataclass(frozen=True, slots=True, kw_only=True)
class RampEffect(_BaseEffect):
    """
    A force that changes linearly from start to end. Ramps can't play forever.
    """

    start: int = 0
    end: int = 0
    envelope: Envelope = field(default_factory=Envelope)

    @classmethod
    def from_sdl(cls, value: _Ramp) -> Self:
        return cls(start=value.start, end=value.end, envelope=Envelope.from_sdl(value), **cls._header(value))  # type: ignore[arg-type]

    def to_sdl(self) -> NativeEffect:
        effect = NativeEffect()
        self._fill_header(effect.ramp, Features.RAMP)
        effect.ramp.start = self.start
        effect.ramp.end = self.end
        self.envelope.fill(effect.ramp)
        return effect


@dataclass(frozen=True, slots=True, kw_only=True)
class LeftRightEffect:
    """
    Controls the large and the small motor of a rumble device.
    """

    length: int | None = None
    #: Control of the large controller motor.
    large_magnitude: int = 0
    #: Control of the small controller motor.
    small_magnitude: int = 0

    @classmethod
    def from_sdl(cls, value: _LeftRight) -> Self:
        return cls(
            length=_length_from_sdl(value.length),
            large_magnitude=value.large_magnitude,
            small_magnitude=value.small_magnitude,
        )

    def to_sdl(self) -> NativeEffect:
        effect = NativeEffect()
        effect.leftright.type = Features.LEFTRIGHT
        effect.leftright.length = _length_to_sdl(self.length)
        effect.leftright.large_magnitude = self.large_magnitude
        effect.leftright.small_magnitude = self.small_magnitude
        return effect


@dataclass(frozen=True, slots=True, kw_only=True)
class CustomEffect(_BaseEffect):
    """
    A periodic effect with an application defined shape.

    :ivar data: channels * samples values, interleaved by channel.
    """

    channels: int = 1
    period: int = 0
    data: Sequence[int] = ()
    envelope: Envelope = field(default_factory=Envelope)

    @property
    def samples(self) -> int:
        return len(self.data) // self.channels

    @classmethod
    def from_sdl(cls, value: _Custom) -> Self:
        count = value.channels * value.samples
        data = tuple(value.data[i] for i in range(count)) if value.data else ()
        return cls(
            channels=value.channels,
            period=value.period,
            data=data,
            envelope=Envelope.from_sdl(value),
            **cls._header(value),  # type: ignore[arg-type]
        )

    def to_sdl(self) -> NativeEffect:
        if self.channels < 1 or len(self.data) % self.channels:
            raise ValueError("data must hold channels * samples values")

        effect = NativeEffect()
        custom = effect.custom
        self._fill_header(custom, Features.CUSTOM)
        custom.channels = self.channels
        custom.period = self.period
        custom.samples = self.samples
        # The structure keeps the array alive.
        custom.data = (ctypes.c_uint16 * len(self.data))(*self.data)
        self.envelope.fill(custom)
        return effect


type Effect = ConstantEffect | PeriodicEffect | ConditionEffect | RampEffect | LeftRightEffect | CustomEffect


def effect_from_sdl(value: NativeEffect) -> Effect | None:
    """
    Convert a native effect.

    :return: The effect, or None if the type is unknown.
    """
    match value.type:
        case Features.CONSTANT:
            return ConstantEffect.from_sdl(value.constant)
        case Features.SINE | Features.SQUARE | Features.TRIANGLE | Features.SAWTOOTHUP | Features.SAWTOOTHDOWN:
            return PeriodicEffect.from_sdl(value.periodic)
        case Features.SPRING | Features.DAMPER | Features.INERTIA | Features.FRICTION:
            return ConditionEffect.from_sdl(value.condition)
        case Features.RAMP:
            return RampEffect.from_sdl(value.ramp)
        case Features.LEFTRIGHT:
            return LeftRightEffect.from_sdl(value.leftright)
        case Features.CUSTOM:
            return CustomEffect.from_sdl(value.custom)
    return None


class _Haptic(ctypes.Structure):
    pass


_HapticP = ctypes.POINTER(_Haptic)
_EffectP = ctypes.POINTER(NativeEffect)
_ID = ctypes.c_uint32

_SDL_GetHaptics = bind("SDL_GetHaptics", [ctypes.POINTER(ctypes.c_int)], ctypes.POINTER(_ID))
_SDL_GetHapticNameForID = bind("SDL_GetHapticNameForID", [_ID], ctypes.c_char_p)
_SDL_OpenHaptic = bind("SDL_OpenHaptic", [_ID], _HapticP)
_SDL_GetHapticFromID = bind("SDL_GetHapticFromID", [_ID], _HapticP)
_SDL_GetHapticID = bind("SDL_GetHapticID", [_HapticP], _ID)
_SDL_GetHapticName = bind("SDL_GetHapticName", [_HapticP], ctypes.c_char_p)
_SDL_IsMouseHaptic = bind("SDL_IsMouseHaptic", [], ctypes.c_bool)
_SDL_OpenHapticFromMouse = bind("SDL_OpenHapticFromMouse", [], _HapticP)
_SDL_IsJoystickHaptic = bind("SDL_IsJoystickHaptic", [_JoystickP], ctypes.c_bool)
_SDL_OpenHapticFromJoystick = bind("SDL_OpenHapticFromJoystick", [_JoystickP], _HapticP)
_SDL_CloseHaptic = bind("SDL_CloseHaptic", [_HapticP], None)
_SDL_GetMaxHapticEffects = bind("SDL_GetMaxHapticEffects", [_HapticP], ctypes.c_int)
_SDL_GetMaxHapticEffectsPlaying = bind("SDL_GetMaxHapticEffectsPlaying", [_HapticP], ctypes.c_int)
_SDL_GetHapticFeatures = bind("SDL_GetHapticFeatures", [_HapticP], ctypes.c_uint32)
_SDL_GetNumHapticAxes = bind("SDL_GetNumHapticAxes", [_HapticP], ctypes.c_int)
_SDL_HapticEffectSupported = bind("SDL_HapticEffectSupported", [_HapticP, _EffectP], ctypes.c_bool)
_SDL_CreateHapticEffect = bind("SDL_CreateHapticEffect", [_HapticP, _EffectP], ctypes.c_int)
_SDL_UpdateHapticEffect = bind("SDL_UpdateHapticEffect", [_HapticP, ctypes.c_int, _EffectP], ctypes.c_bool)
_SDL_RunHapticEffect = bind("SDL_RunHapticEffect", [_HapticP, ctypes.c_int, ctypes.c_uint32], ctypes.c_bool)
_SDL_StopHapticEffect = bind("SDL_StopHapticEffect", [_HapticP, ctypes.c_int], ctypes.c_bool)
_SDL_DestroyHapticEffect = bind("SDL_DestroyHapticEffect", [_HapticP, ctypes.c_int], None)
_SDL_GetHapticEffectStatus = bind("SDL_GetHapticEffectStatus", [_HapticP, ctypes.c_int], ctypes.c_bool)
_SDL_SetHapticGain = bind("SDL_SetHapticGain", [_HapticP, ctypes.c_int], ctypes.c_bool)
_SDL_SetHapticAutocenter = bind("SDL_SetHapticAutocenter", [_HapticP, ctypes.c_int], ctypes.c_bool)
_SDL_PauseHaptic = bind("SDL_PauseHaptic", [_HapticP], ctypes.c_bool)
_SDL_ResumeHaptic = bind("SDL_ResumeHaptic", [_HapticP], ctypes.c_bool)
_SDL_StopHapticEffects = bind("SDL_StopHapticEffects", [_HapticP], ctypes.c_bool)
_SDL_HapticRumbleSupported = bind("SDL_HapticRumbleSupported", [_HapticP], ctypes.c_bool)
_SDL_InitHapticRumble = bind("SDL_InitHapticRumble", [_HapticP], ctypes.c_bool)
_SDL_PlayHapticRumble = bind("SDL_PlayHapticRumble", [_HapticP, ctypes.c_float, ctypes.c_uint32], ctypes.c_bool)
_SDL_StopHapticRumble = bind("SDL_StopHapticRumble", [_HapticP], ctypes.c_bool)


def get_haptics() -> list[int]:
    """
    :return: The instance ids of the currently connected haptic devices.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetHaptics(ctypes.byref(count)))
    return stdinc.take_array(array, count.value)


def get_name_for_id(haptic_id: int) -> str:
    return errors.check_null(_SDL_GetHapticNameForID(haptic_id)).decode("utf-8")


def is_mouse_haptic() -> bool:
    return bool(_SDL_IsMouseHaptic())


def is_joystick_haptic(joystick: Joystick) -> bool:
    return bool(_SDL_IsJoystickHaptic(joystick.pointer))


class Haptic(AbstractContextManager["Haptic"]):
    """
    An opened haptic device (SDL_Haptic).

    Effects are referenced by the integer ids returned by create_effect().
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Haptic]) -> None:
        self.pointer = pointer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Haptic):
            return NotImplemented
        return ctypes.cast(self.pointer, ctypes.c_void_p).value == ctypes.cast(other.pointer, ctypes.c_void_p).value

    def __hash__(self) -> int:
        return hash(ctypes.cast(self.pointer, ctypes.c_void_p).value)

    @classmethod
    def open(cls, haptic_id: int) -> Self:
        return cls(errors.check_null(_SDL_OpenHaptic(haptic_id)))

    @classmethod
    def from_id(cls, haptic_id: int) -> Self:
        """
        Get an already opened haptic device.
        """
        return cls(errors.check_null(_SDL_GetHapticFromID(haptic_id)))

    @classmethod
    def from_mouse(cls) -> Self:
        return cls(errors.check_null(_SDL_OpenHapticFromMouse()))

    @classmethod
    def from_joystick(cls, joystick: Joystick) -> Self:
        """
        Open the haptic device of a joystick.

        The joystick must stay open while the haptic device is in use.
        """
        return cls(errors.check_null(_SDL_OpenHapticFromJoystick(joystick.pointer)))

    def close(self) -> None:
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _HapticP()
        _SDL_CloseHaptic(pointer)

    @property
    def id(self) -> int:
        return errors.check_id(_SDL_GetHapticID(self.pointer))

    @property
    def name(self) -> str:
        return errors.check_null(_SDL_GetHapticName(self.pointer)).decode("utf-8")

    @property
    def features(self) -> Features:
        return Features(errors.check_id(_SDL_GetHapticFeatures(self.pointer)))

    @property
    def num_axes(self) -> int:
        return errors.check(_SDL_GetNumHapticAxes(self.pointer), -1)

    @property
    def max_effects(self) -> int:
        """
        The number of effects the device can store. Not all devices report this correctly.
        """
        return errors.check(_SDL_GetMaxHapticEffects(self.pointer), -1)

    @property
    def max_effects_playing(self) -> int:
        return errors.check(_SDL_GetMaxHapticEffectsPlaying(self.pointer), -1)

    def effect_supported(self, effect: Effect) -> bool:
        return bool(_SDL_HapticEffectSupported(self.pointer, ctypes.byref(effect.to_sdl())))

    def create_effect(self, effect: Effect) -> int:
        """
        Upload an effect to the device.

        :return: The id of the effect.
        """
        return errors.check(_SDL_CreateHapticEffect(self.pointer, ctypes.byref(effect.to_sdl())), -1)

    def update_effect(self, effect_id: int, effect: Effect) -> None:
        """
        Update the properties of an effect. The type of an effect can't be changed.
        """
        errors.check_bool(_SDL_UpdateHapticEffect(self.pointer, effect_id, ctypes.byref(effect.to_sdl())))

    def run_effect(self, effect_id: int, iterations: int | None = 1) -> None:
        """
        :param iterations: Number of times to repeat the effect. None repeats it forever.
        """
        errors.check_bool(_SDL_RunHapticEffect(self.pointer, effect_id, _length_to_sdl(iterations)))

    def stop_effect(self, effect_id: int) -> None:
        errors.check_bool(_SDL_StopHapticEffect(self.pointer, effect_id))

    def destroy_effect(self, effect_id: int) -> None:
        _SDL_DestroyHapticEffect(self.pointer, effect_id)

    def get_effect_status(self, effect_id: int) -> bool:
        """
        :return: True if the effect is playing. Requires Features.STATUS.
        """
        return bool(_SDL_GetHapticEffectStatus(self.pointer, effect_id))

    def stop_effects(self) -> None:
        errors.check_bool(_SDL_StopHapticEffects(self.pointer))

    def set_gain(self, gain: int) -> None:
        """
        :param gain: Global gain between 0 and 100. Requires Features.GAIN.
        """
        if not 0 <= gain <= 100:
            errors.invalid_param_error("gain")
        errors.check_bool(_SDL_SetHapticGain(self.pointer, gain))

    def set_autocenter(self, autocenter: int) -> None:
        """
        :param autocenter: Strength between 0 and 100. 0 disables autocentering.
        """
        if not 0 <= autocenter <= 100:
            errors.invalid_param_error("autocenter")
        errors.check_bool(_SDL_SetHapticAutocenter(self.pointer, autocenter))

    def pause(self) -> None:
        errors.check_bool(_SDL_PauseHaptic(self.pointer))

    def resume(self) -> None:
        errors.check_bool(_SDL_ResumeHaptic(self.pointer))

    def rumble_supported(self) -> bool:
        return bool(_SDL_HapticRumbleSupported(self.pointer))

    def init_rumble(self) -> None:
        errors.check_bool(_SDL_InitHapticRumble(self.pointer))

    def play_rumble(self, strength: float, length_ms: int) -> None:
        """
        Play a simple rumble effect. Call init_rumble() first.

        :param strength: Between 0 and 1.
        """
        errors.check_bool(_SDL_PlayHapticRumble(self.pointer, strength, length_ms))

    def stop_rumble(self) -> None:
        errors.check_bool(_SDL_StopHapticRumble(self.pointer))
