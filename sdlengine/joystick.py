# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Low level joystick access.

Joysticks are identified by instance ids (JoystickID) that stay valid
while the device is connected. Open a device to read its state:

    >>> for joystick_id in get_joysticks():
    ...     with Joystick.open(joystick_id) as joystick:
    ...         print(joystick.name, joystick.get_axis(0))

Virtual joysticks can be attached with attach_virtual(), which is useful
for testing input handling without hardware.
"""

from __future__ import annotations

import ctypes
from collections.abc import Buffer, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from types import TracebackType
from typing import NamedTuple, Self

from . import errors, properties, stdinc
from ._dll import bind
from .power import PowerState

__all__ = [
    "AXIS_MAX",
    "AXIS_MIN",
    "GUID",
    "ConnectionState",
    "GuidInfo",
    "Hat",
    "Joystick",
    "JoystickCapabilities",
    "JoystickType",
    "VirtualJoystick",
    "attach_virtual",
    "detach_virtual",
    "events_enabled",
    "get_guid_for_id",
    "get_joysticks",
    "get_name_for_id",
    "get_path_for_id",
    "get_player_index_for_id",
    "get_product_for_id",
    "get_product_version_for_id",
    "get_type_for_id",
    "get_vendor_for_id",
    "has_joystick",
    "is_virtual",
    "lock",
    "locked",
    "set_events_enabled",
    "unlock",
    "update",
]


AXIS_MAX = 32767
AXIS_MIN = -32768


class JoystickType(IntEnum):
    UNKNOWN = 0
    GAMEPAD = 1
    WHEEL = 2
    ARCADE_STICK = 3
    FLIGHT_STICK = 4
    DANCE_PAD = 5
    GUITAR = 6
    DRUM_KIT = 7
    ARCADE_PAD = 8
    THROTTLE = 9


class ConnectionState(IntEnum):
    INVALID = -1
    UNKNOWN = 0
    WIRED = 1
    WIRELESS = 2


class Hat(IntFlag):
    """
    Joystick hat positions. Diagonals are combinations of the base directions.
    """

    CENTERED = 0x00
    UP = 0x01
    RIGHT = 0x02
    DOWN = 0x04
    LEFT = 0x08
    RIGHTUP = RIGHT | UP
    RIGHTDOWN = RIGHT | DOWN
    LEFTUP = LEFT | UP
    LEFTDOWN = LEFT | DOWN


class GUID(ctypes.Structure):
    """
    A 128-bit identifier for an input device (SDL_GUID).

    The string form is the lowercase hex encoding of the 16 bytes, as SDL prints it.
    """

    _fields_ = [("data", ctypes.c_uint8 * 16)]

    def __repr__(self) -> str:
        return f"GUID({str(self)!r})"

    def __str__(self) -> str:
        return bytes(self.data).hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GUID):
            return NotImplemented
        return bytes(self.data) == bytes(other.data)

    def __hash__(self) -> int:
        return hash(bytes(self.data))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """
        Parse the string form of a GUID. Invalid or short strings parse like SDL does, to a zero-padded GUID.
        """
        raw = bytearray(16)
        for i in range(min(len(value) // 2, 16)):
            try:
                raw[i] = int(value[i * 2 : i * 2 + 2], 16)
            except ValueError:
                break
        return cls((ctypes.c_uint8 * 16)(*raw))

    @classmethod
    def from_bytes(cls, value: bytes) -> Self:
        if len(value) != 16:
            raise ValueError("A GUID has exactly 16 bytes")
        return cls((ctypes.c_uint8 * 16)(*value))


class GuidInfo(NamedTuple):
    vendor: int
    product: int
    version: int
    crc16: int


class _VirtualJoystickDesc(ctypes.Structure):
    _fields_ = [
        ("version", ctypes.c_uint32),
        ("type", ctypes.c_uint16),
        ("padding", ctypes.c_uint16),
        ("vendor_id", ctypes.c_uint16),
        ("product_id", ctypes.c_uint16),
        ("naxes", ctypes.c_uint16),
        ("nbuttons", ctypes.c_uint16),
        ("nballs", ctypes.c_uint16),
        ("nhats", ctypes.c_uint16),
        ("ntouchpads", ctypes.c_uint16),
        ("nsensors", ctypes.c_uint16),
        ("padding2", ctypes.c_uint16 * 2),
        ("button_mask", ctypes.c_uint32),
        ("axis_mask", ctypes.c_uint32),
        ("name", ctypes.c_char_p),
        ("touchpads", ctypes.c_void_p),
        ("sensors", ctypes.c_void_p),
        ("userdata", ctypes.c_void_p),
        # Optional driver callbacks, left unset.
        ("Update", ctypes.c_void_p),
        ("SetPlayerIndex", ctypes.c_void_p),
        ("Rumble", ctypes.c_void_p),
        ("RumbleTriggers", ctypes.c_void_p),
        ("SetLED", ctypes.c_void_p),
        ("SendEffect", ctypes.c_void_p),
        ("SetSensorsEnabled", ctypes.c_void_p),
        ("Cleanup", ctypes.c_void_p),
    ]


@dataclass
class VirtualJoystick:
    """
    Description of a virtual joystick for attach_virtual().
    """

    name: str | None = None
    type: JoystickType = JoystickType.GAMEPAD
    vendor_id: int = 0
    product_id: int = 0
    naxes: int = 0
    nbuttons: int = 0
    nballs: int = 0
    nhats: int = 0

    def to_sdl(self) -> _VirtualJoystickDesc:
        desc = _VirtualJoystickDesc()
        desc.version = ctypes.sizeof(_VirtualJoystickDesc)
        desc.type = self.type
        desc.vendor_id = self.vendor_id
        desc.product_id = self.product_id
        desc.naxes = self.naxes
        desc.nbuttons = self.nbuttons
        desc.nballs = self.nballs
        desc.nhats = self.nhats
        desc.name = None if self.name is None else self.name.encode("utf-8")
        return desc


@dataclass(frozen=True, slots=True)
class JoystickCapabilities:
    """
    Capabilities read from the properties of an opened joystick.
    """

    mono_led: bool = False
    rgb_led: bool = False
    player_led: bool = False
    rumble: bool = False
    trigger_rumble: bool = False

    MONO_LED_BOOLEAN = "SDL.joystick.cap.mono_led"
    RGB_LED_BOOLEAN = "SDL.joystick.cap.rgb_led"
    PLAYER_LED_BOOLEAN = "SDL.joystick.cap.player_led"
    RUMBLE_BOOLEAN = "SDL.joystick.cap.rumble"
    TRIGGER_RUMBLE_BOOLEAN = "SDL.joystick.cap.trigger_rumble"

    @classmethod
    def from_group(cls, group: properties.Group) -> Self:
        return cls(
            mono_led=group.get_boolean(cls.MONO_LED_BOOLEAN),
            rgb_led=group.get_boolean(cls.RGB_LED_BOOLEAN),
            player_led=group.get_boolean(cls.PLAYER_LED_BOOLEAN),
            rumble=group.get_boolean(cls.RUMBLE_BOOLEAN),
            trigger_rumble=group.get_boolean(cls.TRIGGER_RUMBLE_BOOLEAN),
        )


class _Joystick(ctypes.Structure):
    pass


_JoystickP = ctypes.POINTER(_Joystick)
_U16P = ctypes.POINTER(ctypes.c_uint16)
_IntP = ctypes.POINTER(ctypes.c_int)
_ID = ctypes.c_uint32

_SDL_LockJoysticks = bind("SDL_LockJoysticks", [], None)
_SDL_UnlockJoysticks = bind("SDL_UnlockJoysticks", [], None)
_SDL_HasJoystick = bind("SDL_HasJoystick", [], ctypes.c_bool)
_SDL_GetJoysticks = bind("SDL_GetJoysticks", [_IntP], ctypes.POINTER(_ID))
_SDL_GetJoystickNameForID = bind("SDL_GetJoystickNameForID", [_ID], ctypes.c_char_p)
_SDL_GetJoystickPathForID = bind("SDL_GetJoystickPathForID", [_ID], ctypes.c_char_p)
_SDL_GetJoystickPlayerIndexForID = bind("SDL_GetJoystickPlayerIndexForID", [_ID], ctypes.c_int)
_SDL_GetJoystickGUIDForID = bind("SDL_GetJoystickGUIDForID", [_ID], GUID)
_SDL_GetJoystickVendorForID = bind("SDL_GetJoystickVendorForID", [_ID], ctypes.c_uint16)
_SDL_GetJoystickProductForID = bind("SDL_GetJoystickProductForID", [_ID], ctypes.c_uint16)
_SDL_GetJoystickProductVersionForID = bind("SDL_GetJoystickProductVersionForID", [_ID], ctypes.c_uint16)
_SDL_GetJoystickTypeForID = bind("SDL_GetJoystickTypeForID", [_ID], ctypes.c_int)
_SDL_OpenJoystick = bind("SDL_OpenJoystick", [_ID], _JoystickP)
_SDL_GetJoystickFromID = bind("SDL_GetJoystickFromID", [_ID], _JoystickP)
_SDL_GetJoystickFromPlayerIndex = bind("SDL_GetJoystickFromPlayerIndex", [ctypes.c_int], _JoystickP)
_SDL_AttachVirtualJoystick = bind("SDL_AttachVirtualJoystick", [ctypes.POINTER(_VirtualJoystickDesc)], _ID)
_SDL_DetachVirtualJoystick = bind("SDL_DetachVirtualJoystick", [_ID], ctypes.c_bool)
_SDL_IsJoystickVirtual = bind("SDL_IsJoystickVirtual", [_ID], ctypes.c_bool)
_SDL_SetJoystickVirtualAxis = bind(
    "SDL_SetJoystickVirtualAxis", [_JoystickP, ctypes.c_int, ctypes.c_int16], ctypes.c_bool
)
_SDL_SetJoystickVirtualBall = bind(
    "SDL_SetJoystickVirtualBall", [_JoystickP, ctypes.c_int, ctypes.c_int16, ctypes.c_int16], ctypes.c_bool
)
_SDL_SetJoystickVirtualButton = bind(
    "SDL_SetJoystickVirtualButton", [_JoystickP, ctypes.c_int, ctypes.c_bool], ctypes.c_bool
)
_SDL_SetJoystickVirtualHat = bind("SDL_SetJoystickVirtualHat", [_JoystickP, ctypes.c_int, ctypes.c_uint8], ctypes.c_bool)
_SDL_GetJoystickProperties = bind("SDL_GetJoystickProperties", [_JoystickP], ctypes.c_uint32)
_SDL_GetJoystickName = bind("SDL_GetJoystickName", [_JoystickP], ctypes.c_char_p)
_SDL_GetJoystickPath = bind("SDL_GetJoystickPath", [_JoystickP], ctypes.c_char_p)
_SDL_GetJoystickPlayerIndex = bind("SDL_GetJoystickPlayerIndex", [_JoystickP], ctypes.c_int)
_SDL_SetJoystickPlayerIndex = bind("SDL_SetJoystickPlayerIndex", [_JoystickP, ctypes.c_int], ctypes.c_bool)
_SDL_GetJoystickGUID = bind("SDL_GetJoystickGUID", [_JoystickP], GUID)
_SDL_GetJoystickVendor = bind("SDL_GetJoystickVendor", [_JoystickP], ctypes.c_uint16)
_SDL_GetJoystickProduct = bind("SDL_GetJoystickProduct", [_JoystickP], ctypes.c_uint16)
_SDL_GetJoystickProductVersion = bind("SDL_GetJoystickProductVersion", [_JoystickP], ctypes.c_uint16)
_SDL_GetJoystickFirmwareVersion = bind("SDL_GetJoystickFirmwareVersion", [_JoystickP], ctypes.c_uint16)
_SDL_GetJoystickSerial = bind("SDL_GetJoystickSerial", [_JoystickP], ctypes.c_char_p)
_SDL_GetJoystickType = bind("SDL_GetJoystickType", [_JoystickP], ctypes.c_int)
_SDL_GetJoystickGUIDInfo = bind("SDL_GetJoystickGUIDInfo", [GUID, _U16P, _U16P, _U16P, _U16P], None)
_SDL_JoystickConnected = bind("SDL_JoystickConnected", [_JoystickP], ctypes.c_bool)
_SDL_GetJoystickID = bind("SDL_GetJoystickID", [_JoystickP], _ID)
_SDL_GetNumJoystickAxes = bind("SDL_GetNumJoystickAxes", [_JoystickP], ctypes.c_int)
_SDL_GetNumJoystickBalls = bind("SDL_GetNumJoystickBalls", [_JoystickP], ctypes.c_int)
_SDL_GetNumJoystickHats = bind("SDL_GetNumJoystickHats", [_JoystickP], ctypes.c_int)
_SDL_GetNumJoystickButtons = bind("SDL_GetNumJoystickButtons", [_JoystickP], ctypes.c_int)
_SDL_SetJoystickEventsEnabled = bind("SDL_SetJoystickEventsEnabled", [ctypes.c_bool], None)
_SDL_JoystickEventsEnabled = bind("SDL_JoystickEventsEnabled", [], ctypes.c_bool)
_SDL_UpdateJoysticks = bind("SDL_UpdateJoysticks", [], None)
_SDL_GetJoystickAxis = bind("SDL_GetJoystickAxis", [_JoystickP, ctypes.c_int], ctypes.c_int16)
_SDL_GetJoystickAxisInitialState = bind(
    "SDL_GetJoystickAxisInitialState", [_JoystickP, ctypes.c_int, ctypes.POINTER(ctypes.c_int16)], ctypes.c_bool
)
_SDL_GetJoystickBall = bind("SDL_GetJoystickBall", [_JoystickP, ctypes.c_int, _IntP, _IntP], ctypes.c_bool)
_SDL_GetJoystickHat = bind("SDL_GetJoystickHat", [_JoystickP, ctypes.c_int], ctypes.c_uint8)
_SDL_GetJoystickButton = bind("SDL_GetJoystickButton", [_JoystickP, ctypes.c_int], ctypes.c_bool)
_SDL_RumbleJoystick = bind(
    "SDL_RumbleJoystick", [_JoystickP, ctypes.c_uint16, ctypes.c_uint16, ctypes.c_uint32], ctypes.c_bool
)
_SDL_RumbleJoystickTriggers = bind(
    "SDL_RumbleJoystickTriggers", [_JoystickP, ctypes.c_uint16, ctypes.c_uint16, ctypes.c_uint32], ctypes.c_bool
)
_SDL_SetJoystickLED = bind(
    "SDL_SetJoystickLED", [_JoystickP, ctypes.c_uint8, ctypes.c_uint8, ctypes.c_uint8], ctypes.c_bool
)
_SDL_SendJoystickEffect = bind("SDL_SendJoystickEffect", [_JoystickP, ctypes.c_void_p, ctypes.c_int], ctypes.c_bool)
_SDL_CloseJoystick = bind("SDL_CloseJoystick", [_JoystickP], None)
_SDL_GetJoystickConnectionState = bind("SDL_GetJoystickConnectionState", [_JoystickP], ctypes.c_int)
_SDL_GetJoystickPowerInfo = bind("SDL_GetJoystickPowerInfo", [_JoystickP, _IntP], ctypes.c_int)


def _optional_string(raw: bytes | None) -> str | None:
    return None if raw is None else raw.decode("utf-8")


def lock() -> None:
    """
    Lock the joystick API for atomic access from multiple threads.
    """
    _SDL_LockJoysticks()


def unlock() -> None:
    _SDL_UnlockJoysticks()


@contextmanager
def locked() -> Iterator[None]:
    lock()
    try:
        yield
    finally:
        unlock()


def has_joystick() -> bool:
    return bool(_SDL_HasJoystick())


def get_joysticks() -> list[int]:
    """
    :return: The instance ids of the currently connected joysticks.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetJoysticks(ctypes.byref(count)))
    return stdinc.take_array(array, count.value)


def get_name_for_id(joystick_id: int) -> str:
    return errors.check_null(_SDL_GetJoystickNameForID(joystick_id)).decode("utf-8")


def get_path_for_id(joystick_id: int) -> str:
    return errors.check_null(_SDL_GetJoystickPathForID(joystick_id)).decode("utf-8")


def get_player_index_for_id(joystick_id: int) -> int | None:
    index = _SDL_GetJoystickPlayerIndexForID(joystick_id)
    return None if index == -1 else index


def get_guid_for_id(joystick_id: int) -> GUID:
    return _SDL_GetJoystickGUIDForID(joystick_id)


def get_vendor_for_id(joystick_id: int) -> int | None:
    """
    :return: The USB vendor id, or None if it is not available.
    """
    return _SDL_GetJoystickVendorForID(joystick_id) or None


def get_product_for_id(joystick_id: int) -> int | None:
    return _SDL_GetJoystickProductForID(joystick_id) or None


def get_product_version_for_id(joystick_id: int) -> int | None:
    return _SDL_GetJoystickProductVersionForID(joystick_id) or None


def get_type_for_id(joystick_id: int) -> JoystickType:
    return JoystickType(_SDL_GetJoystickTypeForID(joystick_id))


def get_guid_info(guid: GUID) -> GuidInfo:
    """
    Decode the device information encoded in a joystick GUID.
    """
    values = [ctypes.c_uint16() for _ in range(4)]
    _SDL_GetJoystickGUIDInfo(guid, *map(ctypes.byref, values))
    return GuidInfo(*(v.value for v in values))


def attach_virtual(desc: VirtualJoystick) -> int:
    """
    Attach a new virtual joystick.

    :return: The instance id of the new joystick.
    """
    return errors.check_id(_SDL_AttachVirtualJoystick(ctypes.byref(desc.to_sdl())))


def detach_virtual(joystick_id: int) -> None:
    errors.check_bool(_SDL_DetachVirtualJoystick(joystick_id))


def is_virtual(joystick_id: int) -> bool:
    return bool(_SDL_IsJoystickVirtual(joystick_id))


def set_events_enabled(enabled: bool) -> None:
    """
    If joystick events are disabled, update() must be called to refresh the joystick state.
    """
    _SDL_SetJoystickEventsEnabled(enabled)


def events_enabled() -> bool:
    return bool(_SDL_JoystickEventsEnabled())


def update() -> None:
    _SDL_UpdateJoysticks()


class Joystick(AbstractContextManager["Joystick"]):
    """
    An opened joystick (SDL_Joystick).
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Joystick]) -> None:
        self.pointer = pointer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Joystick):
            return NotImplemented
        return ctypes.cast(self.pointer, ctypes.c_void_p).value == ctypes.cast(other.pointer, ctypes.c_void_p).value

    def __hash__(self) -> int:
        return hash(ctypes.cast(self.pointer, ctypes.c_void_p).value)

    def __repr__(self) -> str:
        if not self.pointer:
            return "<Joystick closed>"
        return f"<Joystick {self.id} {self.name!r}>"

    @classmethod
    def open(cls, joystick_id: int) -> Self:
        return cls(errors.check_null(_SDL_OpenJoystick(joystick_id)))

    @classmethod
    def from_id(cls, joystick_id: int) -> Self:
        """
        Get an already opened joystick.
        """
        return cls(errors.check_null(_SDL_GetJoystickFromID(joystick_id)))

    @classmethod
    def from_player_index(cls, player_index: int) -> Self:
        return cls(errors.check_null(_SDL_GetJoystickFromPlayerIndex(player_index)))

    def close(self) -> None:
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _JoystickP()
        _SDL_CloseJoystick(pointer)

    @property
    def id(self) -> int:
        return errors.check_id(_SDL_GetJoystickID(self.pointer))

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetJoystickProperties(self.pointer)))

    @property
    def capabilities(self) -> JoystickCapabilities:
        return JoystickCapabilities.from_group(self.properties)

    @property
    def name(self) -> str:
        return errors.check_null(_SDL_GetJoystickName(self.pointer)).decode("utf-8")

    @property
    def path(self) -> str:
        return errors.check_null(_SDL_GetJoystickPath(self.pointer)).decode("utf-8")

    @property
    def player_index(self) -> int | None:
        index = _SDL_GetJoystickPlayerIndex(self.pointer)
        return None if index == -1 else index

    @player_index.setter
    def player_index(self, index: int | None) -> None:
        errors.check_bool(_SDL_SetJoystickPlayerIndex(self.pointer, -1 if index is None else index))

    @property
    def guid(self) -> GUID:
        return _SDL_GetJoystickGUID(self.pointer)

    @property
    def vendor(self) -> int | None:
        return _SDL_GetJoystickVendor(self.pointer) or None

    @property
    def product(self) -> int | None:
        return _SDL_GetJoystickProduct(self.pointer) or None

    @property
    def product_version(self) -> int | None:
        return _SDL_GetJoystickProductVersion(self.pointer) or None

    @property
    def firmware_version(self) -> int | None:
        return _SDL_GetJoystickFirmwareVersion(self.pointer) or None

    @property
    def serial(self) -> str | None:
        return _optional_string(_SDL_GetJoystickSerial(self.pointer))

    @property
    def type(self) -> JoystickType:
        return JoystickType(_SDL_GetJoystickType(self.pointer))

    def connected(self) -> bool:
        return bool(_SDL_JoystickConnected(self.pointer))

    def get_connection_state(self) -> ConnectionState:
        return ConnectionState(errors.check(_SDL_GetJoystickConnectionState(self.pointer), ConnectionState.INVALID))

    def get_power_info(self) -> tuple[PowerState, int | None]:
        """
        :return: The battery state and the charge percentage, if known.
        """
        percent = ctypes.c_int(-1)
        state = errors.check(_SDL_GetJoystickPowerInfo(self.pointer, ctypes.byref(percent)), PowerState.ERROR)
        return PowerState(state), None if percent.value == -1 else percent.value

    @property
    def num_axes(self) -> int:
        return errors.check(_SDL_GetNumJoystickAxes(self.pointer), -1)

    @property
    def num_balls(self) -> int:
        return errors.check(_SDL_GetNumJoystickBalls(self.pointer), -1)

    @property
    def num_hats(self) -> int:
        return errors.check(_SDL_GetNumJoystickHats(self.pointer), -1)

    @property
    def num_buttons(self) -> int:
        return errors.check(_SDL_GetNumJoystickButtons(self.pointer), -1)

    def get_axis(self, axis: int) -> int:
        """
        :return: The axis position between AXIS_MIN and AXIS_MAX.
        """
        if not 0 <= axis < self.num_axes:
            errors.invalid_param_error("axis")
        return _SDL_GetJoystickAxis(self.pointer, axis)

    def get_axis_initial_state(self, axis: int) -> int | None:
        """
        :return: The axis position when the device was opened, or None if the axis has no initial state.
        """
        state = ctypes.c_int16()
        if not _SDL_GetJoystickAxisInitialState(self.pointer, axis, ctypes.byref(state)):
            return None
        return state.value

    def get_ball(self, ball: int) -> tuple[int, int]:
        """
        :return: The ball motion since the last call.
        """
        dx, dy = ctypes.c_int(), ctypes.c_int()
        errors.check_bool(_SDL_GetJoystickBall(self.pointer, ball, ctypes.byref(dx), ctypes.byref(dy)))
        return dx.value, dy.value

    def get_hat(self, hat: int) -> Hat:
        return Hat(_SDL_GetJoystickHat(self.pointer, hat))

    def get_button(self, button: int) -> bool:
        return bool(_SDL_GetJoystickButton(self.pointer, button))

    def rumble(self, low_frequency: int, high_frequency: int, duration_ms: int) -> None:
        """
        Start a rumble effect. Each call cancels the previous one. Zero intensities stop the rumble.

        :param low_frequency: Intensity of the low frequency motor, 0 - 0xFFFF.
        """
        errors.check_bool(_SDL_RumbleJoystick(self.pointer, low_frequency, high_frequency, duration_ms))

    def rumble_triggers(self, left: int, right: int, duration_ms: int) -> None:
        errors.check_bool(_SDL_RumbleJoystickTriggers(self.pointer, left, right, duration_ms))

    def set_led(self, r: int, g: int, b: int) -> None:
        errors.check_bool(_SDL_SetJoystickLED(self.pointer, r, g, b))

    def send_effect(self, data: Buffer) -> None:
        """
        Send a device specific effect packet.
        """
        raw = bytes(data)
        errors.check_bool(_SDL_SendJoystickEffect(self.pointer, raw, len(raw)))

    def set_virtual_axis(self, axis: int, value: int) -> None:
        errors.check_bool(_SDL_SetJoystickVirtualAxis(self.pointer, axis, value))

    def set_virtual_ball(self, ball: int, xrel: int, yrel: int) -> None:
        errors.check_bool(_SDL_SetJoystickVirtualBall(self.pointer, ball, xrel, yrel))

    def set_virtual_button(self, button: int, down: bool) -> None:
        errors.check_bool(_SDL_SetJoystickVirtualButton(self.pointer, button, down))

    def set_virtual_hat(self, hat: int, value: Hat) -> None:
        errors.check_bool(_SDL_SetJoystickVirtualHat(self.pointer, hat, value))
