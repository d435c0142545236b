# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
The event queue.

Native events are converted into immutable event objects when they leave
the queue. Every event has a type and a timestamp in nanoseconds. The
subclass depends on the event type:

    >>> for event in poll_all():
    ...     match event:
    ...         case QuitEvent():
    ...             running = False
    ...         case WindowEvent(type=EventType.WINDOW_RESIZED, data1=w, data2=h):
    ...             resize(w, h)

Types without a dedicated class are returned as plain Event instances.

Event watches and the event filter are Python callables. Exceptions raised
in them are logged and the event is kept.
"""

from __future__ import annotations

import ctypes
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from logging import getLogger
from typing import Self

from . import errors
from ._callbacks import Registry
from ._dll import bind
from .joystick import Hat
from .power import PowerState
from .video import Window, _WindowP

__all__ = [
    "AudioDeviceEvent",
    "CameraDeviceEvent",
    "ClipboardEvent",
    "DisplayEvent",
    "DropEvent",
    "Event",
    "EventAction",
    "EventFilter",
    "EventGroup",
    "EventType",
    "JoystickAxisEvent",
    "JoystickBallEvent",
    "JoystickBatteryEvent",
    "JoystickButtonEvent",
    "JoystickDeviceEvent",
    "JoystickHatEvent",
    "KeyboardDeviceEvent",
    "KeyboardEvent",
    "MouseButtonEvent",
    "MouseDeviceEvent",
    "MouseMotionEvent",
    "NativeEvent",
    "QuitEvent",
    "RenderEvent",
    "UserEvent",
    "WindowEvent",
    "add_events",
    "add_watch",
    "event_from_sdl",
    "filter_events",
    "flush",
    "get_filter",
    "get_window",
    "has",
    "is_enabled",
    "peep_events",
    "poll",
    "poll_all",
    "pump",
    "push",
    "register_events",
    "remove_watch",
    "set_enabled",
    "set_filter",
    "wait",
    "wait_timeout",
]


logger = getLogger(__name__)


class EventType(IntEnum):
    FIRST = 0

    QUIT = 0x100
    TERMINATING = 0x101
    LOW_MEMORY = 0x102
    WILL_ENTER_BACKGROUND = 0x103
    DID_ENTER_BACKGROUND = 0x104
    WILL_ENTER_FOREGROUND = 0x105
    DID_ENTER_FOREGROUND = 0x106
    LOCALE_CHANGED = 0x107
    SYSTEM_THEME_CHANGED = 0x108

    DISPLAY_ORIENTATION = 0x151
    DISPLAY_ADDED = 0x152
    DISPLAY_REMOVED = 0x153
    DISPLAY_MOVED = 0x154
    DISPLAY_DESKTOP_MODE_CHANGED = 0x155
    DISPLAY_CURRENT_MODE_CHANGED = 0x156
    DISPLAY_CONTENT_SCALE_CHANGED = 0x157

    WINDOW_SHOWN = 0x202
    WINDOW_HIDDEN = 0x203
    WINDOW_EXPOSED = 0x204
    WINDOW_MOVED = 0x205
    WINDOW_RESIZED = 0x206
    WINDOW_PIXEL_SIZE_CHANGED = 0x207
    WINDOW_METAL_VIEW_RESIZED = 0x208
    WINDOW_MINIMIZED = 0x209
    WINDOW_MAXIMIZED = 0x20A
    WINDOW_RESTORED = 0x20B
    WINDOW_MOUSE_ENTER = 0x20C
    WINDOW_MOUSE_LEAVE = 0x20D
    WINDOW_FOCUS_GAINED = 0x20E
    WINDOW_FOCUS_LOST = 0x20F
    WINDOW_CLOSE_REQUESTED = 0x210
    WINDOW_HIT_TEST = 0x211
    WINDOW_ICCPROF_CHANGED = 0x212
    WINDOW_DISPLAY_CHANGED = 0x213
    WINDOW_DISPLAY_SCALE_CHANGED = 0x214
    WINDOW_SAFE_AREA_CHANGED = 0x215
    WINDOW_OCCLUDED = 0x216
    WINDOW_ENTER_FULLSCREEN = 0x217
    WINDOW_LEAVE_FULLSCREEN = 0x218
    WINDOW_DESTROYED = 0x219
    WINDOW_HDR_STATE_CHANGED = 0x21A

    KEY_DOWN = 0x300
    KEY_UP = 0x301
    TEXT_EDITING = 0x302
    TEXT_INPUT = 0x303
    KEYMAP_CHANGED = 0x304
    KEYBOARD_ADDED = 0x305
    KEYBOARD_REMOVED = 0x306
    TEXT_EDITING_CANDIDATES = 0x307

    MOUSE_MOTION = 0x400
    MOUSE_BUTTON_DOWN = 0x401
    MOUSE_BUTTON_UP = 0x402
    MOUSE_WHEEL = 0x403
    MOUSE_ADDED = 0x404
    MOUSE_REMOVED = 0x405

    JOYSTICK_AXIS_MOTION = 0x600
    JOYSTICK_BALL_MOTION = 0x601
    JOYSTICK_HAT_MOTION = 0x602
    JOYSTICK_BUTTON_DOWN = 0x603
    JOYSTICK_BUTTON_UP = 0x604
    JOYSTICK_ADDED = 0x605
    JOYSTICK_REMOVED = 0x606
    JOYSTICK_BATTERY_UPDATED = 0x607
    JOYSTICK_UPDATE_COMPLETE = 0x608

    GAMEPAD_AXIS_MOTION = 0x650
    GAMEPAD_BUTTON_DOWN = 0x651
    GAMEPAD_BUTTON_UP = 0x652
    GAMEPAD_ADDED = 0x653
    GAMEPAD_REMOVED = 0x654
    GAMEPAD_REMAPPED = 0x655
    GAMEPAD_TOUCHPAD_DOWN = 0x656
    GAMEPAD_TOUCHPAD_MOTION = 0x657
    GAMEPAD_TOUCHPAD_UP = 0x658
    GAMEPAD_SENSOR_UPDATE = 0x659
    GAMEPAD_UPDATE_COMPLETE = 0x65A
    GAMEPAD_STEAM_HANDLE_UPDATED = 0x65B

    FINGER_DOWN = 0x700
    FINGER_UP = 0x701
    FINGER_MOTION = 0x702
    FINGER_CANCELED = 0x703

    CLIPBOARD_UPDATE = 0x900

    DROP_FILE = 0x1000
    DROP_TEXT = 0x1001
    DROP_BEGIN = 0x1002
    DROP_COMPLETE = 0x1003
    DROP_POSITION = 0x1004

    AUDIO_DEVICE_ADDED = 0x1100
    AUDIO_DEVICE_REMOVED = 0x1101
    AUDIO_DEVICE_FORMAT_CHANGED = 0x1102

    SENSOR_UPDATE = 0x1200

    PEN_PROXIMITY_IN = 0x1300
    PEN_PROXIMITY_OUT = 0x1301
    PEN_DOWN = 0x1302
    PEN_UP = 0x1303
    PEN_BUTTON_DOWN = 0x1304
    PEN_BUTTON_UP = 0x1305
    PEN_MOTION = 0x1306
    PEN_AXIS = 0x1307

    CAMERA_DEVICE_ADDED = 0x1400
    CAMERA_DEVICE_REMOVED = 0x1401
    CAMERA_DEVICE_APPROVED = 0x1402
    CAMERA_DEVICE_DENIED = 0x1403

    RENDER_TARGETS_RESET = 0x2000
    RENDER_DEVICE_RESET = 0x2001
    RENDER_DEVICE_LOST = 0x2002

    PRIVATE0 = 0x4000
    PRIVATE1 = 0x4001
    PRIVATE2 = 0x4002
    PRIVATE3 = 0x4003

    POLL_SENTINEL = 0x7F00

    #: Types from USER up to LAST are for the application. Reserve them with register_events().
    USER = 0x8000
    LAST = 0xFFFF


class EventGroup(Enum):
    """
    Ranges of related event types.
    """

    ALL = (EventType.FIRST, EventType.LAST)
    APPLICATION = (EventType.QUIT, EventType.SYSTEM_THEME_CHANGED)
    DISPLAY = (EventType.DISPLAY_ORIENTATION, EventType.DISPLAY_CONTENT_SCALE_CHANGED)
    WINDOW = (EventType.WINDOW_SHOWN, EventType.WINDOW_HDR_STATE_CHANGED)
    KEYBOARD = (EventType.KEY_DOWN, EventType.TEXT_EDITING_CANDIDATES)
    MOUSE = (EventType.MOUSE_MOTION, EventType.MOUSE_REMOVED)
    JOYSTICK = (EventType.JOYSTICK_AXIS_MOTION, EventType.JOYSTICK_UPDATE_COMPLETE)
    GAMEPAD = (EventType.GAMEPAD_AXIS_MOTION, EventType.GAMEPAD_STEAM_HANDLE_UPDATED)
    TOUCH = (EventType.FINGER_DOWN, EventType.FINGER_CANCELED)
    CLIPBOARD = (EventType.CLIPBOARD_UPDATE, EventType.CLIPBOARD_UPDATE)
    DRAG_AND_DROP = (EventType.DROP_FILE, EventType.DROP_POSITION)
    AUDIO = (EventType.AUDIO_DEVICE_ADDED, EventType.AUDIO_DEVICE_FORMAT_CHANGED)
    SENSOR = (EventType.SENSOR_UPDATE, EventType.SENSOR_UPDATE)
    PEN = (EventType.PEN_PROXIMITY_IN, EventType.PEN_AXIS)
    CAMERA = (EventType.CAMERA_DEVICE_ADDED, EventType.CAMERA_DEVICE_DENIED)
    RENDER = (EventType.RENDER_TARGETS_RESET, EventType.RENDER_DEVICE_LOST)
    RESERVED = (EventType.PRIVATE0, EventType.PRIVATE3)
    INTERNAL = (EventType.POLL_SENTINEL, EventType.POLL_SENTINEL)
    USER = (EventType.USER, EventType.LAST)

    @property
    def first(self) -> int:
        return self.value[0]

    @property
    def last(self) -> int:
        return self.value[1]

    def __contains__(self, event_type: object) -> bool:
        if not isinstance(event_type, int):
            return False
        return self.first <= event_type <= self.last

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))


class EventAction(IntEnum):
    ADD = 0
    PEEK = 1
    GET = 2


def _event_type(value: int) -> EventType | int:
    try:
        return EventType(value)
    except ValueError:
        return value


_HEADER = [("type", ctypes.c_uint32), ("reserved", ctypes.c_uint32), ("timestamp", ctypes.c_uint64)]


class _CommonEvent(ctypes.Structure):
    _fields_ = _HEADER


class _DisplayEvent(ctypes.Structure):
    _fields_ = [*_HEADER, ("displayID", ctypes.c_uint32), ("data1", ctypes.c_int32), ("data2", ctypes.c_int32)]


class _WindowEvent(ctypes.Structure):
    _fields_ = [*_HEADER, ("windowID", ctypes.c_uint32), ("data1", ctypes.c_int32), ("data2", ctypes.c_int32)]


class _DeviceEvent(ctypes.Structure):
    _fields_ = [*_HEADER, ("which", ctypes.c_uint32)]


class _KeyboardEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("windowID", ctypes.c_uint32),
        ("which", ctypes.c_uint32),
        ("scancode", ctypes.c_int),
        ("key", ctypes.c_uint32),
        ("mod", ctypes.c_uint16),
        ("raw", ctypes.c_uint16),
        ("down", ctypes.c_bool),
        ("repeat", ctypes.c_bool),
    ]


class _MouseMotionEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("windowID", ctypes.c_uint32),
        ("which", ctypes.c_uint32),
        ("state", ctypes.c_uint32),
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("xrel", ctypes.c_float),
        ("yrel", ctypes.c_float),
    ]


class _MouseButtonEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("windowID", ctypes.c_uint32),
        ("which", ctypes.c_uint32),
        ("button", ctypes.c_uint8),
        ("down", ctypes.c_bool),
        ("clicks", ctypes.c_uint8),
        ("padding", ctypes.c_uint8),
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
    ]


class _JoyAxisEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("which", ctypes.c_uint32),
        ("axis", ctypes.c_uint8),
        ("padding1", ctypes.c_uint8 * 3),
        ("value", ctypes.c_int16),
        ("padding4", ctypes.c_uint16),
    ]


class _JoyBallEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("which", ctypes.c_uint32),
        ("ball", ctypes.c_uint8),
        ("padding1", ctypes.c_uint8 * 3),
        ("xrel", ctypes.c_int16),
        ("yrel", ctypes.c_int16),
    ]


class _JoyHatEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("which", ctypes.c_uint32),
        ("hat", ctypes.c_uint8),
        ("value", ctypes.c_uint8),
        ("padding1", ctypes.c_uint8 * 2),
    ]


class _JoyButtonEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("which", ctypes.c_uint32),
        ("button", ctypes.c_uint8),
        ("down", ctypes.c_bool),
        ("padding1", ctypes.c_uint8 * 2),
    ]


class _JoyBatteryEvent(ctypes.Structure):
    _fields_ = [*_HEADER, ("which", ctypes.c_uint32), ("state", ctypes.c_int), ("percent", ctypes.c_int)]


class _AudioDeviceEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("which", ctypes.c_uint32),
        ("recording", ctypes.c_bool),
        ("padding1", ctypes.c_uint8 * 3),
    ]


class _RenderEvent(ctypes.Structure):
    _fields_ = [*_HEADER, ("windowID", ctypes.c_uint32)]


class _ClipboardEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("owner", ctypes.c_bool),
        ("num_mime_types", ctypes.c_int32),
        ("mime_types", ctypes.POINTER(ctypes.c_char_p)),
    ]


class _DropEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("windowID", ctypes.c_uint32),
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("source", ctypes.c_char_p),
        ("data", ctypes.c_char_p),
    ]


class _UserEvent(ctypes.Structure):
    _fields_ = [
        *_HEADER,
        ("windowID", ctypes.c_uint32),
        ("code", ctypes.c_int32),
        ("data1", ctypes.c_void_p),
        ("data2", ctypes.c_void_p),
    ]


class NativeEvent(ctypes.Union):
    """
    The native SDL_Event union. Always 128 bytes.
    """

    _fields_ = [
        ("type", ctypes.c_uint32),
        ("common", _CommonEvent),
        ("display", _DisplayEvent),
        ("window", _WindowEvent),
        ("kdevice", _DeviceEvent),
        ("key", _KeyboardEvent),
        ("mdevice", _DeviceEvent),
        ("motion", _MouseMotionEvent),
        ("button", _MouseButtonEvent),
        ("jdevice", _DeviceEvent),
        ("jaxis", _JoyAxisEvent),
        ("jball", _JoyBallEvent),
        ("jhat", _JoyHatEvent),
        ("jbutton", _JoyButtonEvent),
        ("jbattery", _JoyBatteryEvent),
        ("adevice", _AudioDeviceEvent),
        ("cdevice", _DeviceEvent),
        ("render", _RenderEvent),
        ("clipboard", _ClipboardEvent),
        ("drop", _DropEvent),
        ("user", _UserEvent),
        ("padding", ctypes.c_uint8 * 128),
    ]


def _native(type: int, timestamp: int) -> NativeEvent:
    event = NativeEvent()
    event.common.type = type
    event.common.timestamp = timestamp
    return event


def _decode(value: bytes | None) -> str | None:
    return None if value is None else value.decode("utf-8")


def _encode(value: str | None) -> bytes | None:
    return None if value is None else value.encode("utf-8")


@dataclass(frozen=True, slots=True, kw_only=True)
class Event:
    """
    An event without a dedicated class.

    :ivar timestamp: In nanoseconds, populated using SDL's tick counter.
    """

    type: EventType | int
    timestamp: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        return cls(type=_event_type(value.type), timestamp=value.common.timestamp)

    def to_sdl(self) -> NativeEvent:
        return _native(self.type, self.timestamp)


@dataclass(frozen=True, slots=True, kw_only=True)
class QuitEvent(Event):
    type: EventType | int = EventType.QUIT


@dataclass(frozen=True, slots=True, kw_only=True)
class DisplayEvent(Event):
    display_id: int = 0
    data1: int = 0
    data2: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.display
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            display_id=native.displayID,
            data1=native.data1,
            data2=native.data2,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.display.displayID = self.display_id
        event.display.data1 = self.data1
        event.display.data2 = self.data2
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class WindowEvent(Event):
    """
    A window state change. The meaning of data1 and data2 depends on the type.
    WINDOW_MOVED carries the position and WINDOW_RESIZED the size.
    """

    window_id: int = 0
    data1: int = 0
    data2: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.window
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            window_id=native.windowID,
            data1=native.data1,
            data2=native.data2,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.window.windowID = self.window_id
        event.window.data1 = self.data1
        event.window.data2 = self.data2
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyboardDeviceEvent(Event):
    which: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        return cls(type=_event_type(value.type), timestamp=value.kdevice.timestamp, which=value.kdevice.which)

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.kdevice.which = self.which
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyboardEvent(Event):
    """
    A key press or release.

    :ivar scancode: The physical key code (SDL_Scancode).
    :ivar key: The virtual key code (SDL_Keycode).
    :ivar mod: Active key modifiers (SDL_Keymod).
    """

    type: EventType | int = EventType.KEY_DOWN
    window_id: int = 0
    which: int = 0
    scancode: int = 0
    key: int = 0
    mod: int = 0
    raw: int = 0
    down: bool = False
    repeat: bool = False

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.key
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            window_id=native.windowID,
            which=native.which,
            scancode=native.scancode,
            key=native.key,
            mod=native.mod,
            raw=native.raw,
            down=native.down,
            repeat=native.repeat,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        native = event.key
        native.windowID = self.window_id
        native.which = self.which
        native.scancode = self.scancode
        native.key = self.key
        native.mod = self.mod
        native.raw = self.raw
        native.down = self.down
        native.repeat = self.repeat
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class MouseDeviceEvent(Event):
    which: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        return cls(type=_event_type(value.type), timestamp=value.mdevice.timestamp, which=value.mdevice.which)

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.mdevice.which = self.which
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class MouseMotionEvent(Event):
    type: EventType | int = EventType.MOUSE_MOTION
    window_id: int = 0
    which: int = 0
    #: Button state bit mask.
    state: int = 0
    x: float = 0.0
    y: float = 0.0
    xrel: float = 0.0
    yrel: float = 0.0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.motion
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            window_id=native.windowID,
            which=native.which,
            state=native.state,
            x=native.x,
            y=native.y,
            xrel=native.xrel,
            yrel=native.yrel,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        native = event.motion
        native.windowID = self.window_id
        native.which = self.which
        native.state = self.state
        native.x, native.y = self.x, self.y
        native.xrel, native.yrel = self.xrel, self.yrel
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class MouseButtonEvent(Event):
    type: EventType | int = EventType.MOUSE_BUTTON_DOWN
    window_id: int = 0
    which: int = 0
    button: int = 0
    down: bool = False
    #: 1 for single-click, 2 for double-click, etc.
    clicks: int = 0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.button
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            window_id=native.windowID,
            which=native.which,
            button=native.button,
            down=native.down,
            clicks=native.clicks,
            x=native.x,
            y=native.y,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        native = event.button
        native.windowID = self.window_id
        native.which = self.which
        native.button = self.button
        native.down = self.down
        native.clicks = self.clicks
        native.x, native.y = self.x, self.y
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class JoystickDeviceEvent(Event):
    which: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        return cls(type=_event_type(value.type), timestamp=value.jdevice.timestamp, which=value.jdevice.which)

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.jdevice.which = self.which
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class JoystickAxisEvent(Event):
    type: EventType | int = EventType.JOYSTICK_AXIS_MOTION
    which: int = 0
    axis: int = 0
    value: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.jaxis
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            which=native.which,
            axis=native.axis,
            value=native.value,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.jaxis.which = self.which
        event.jaxis.axis = self.axis
        event.jaxis.value = self.value
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class JoystickBallEvent(Event):
    type: EventType | int = EventType.JOYSTICK_BALL_MOTION
    which: int = 0
    ball: int = 0
    xrel: int = 0
    yrel: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.jball
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            which=native.which,
            ball=native.ball,
            xrel=native.xrel,
            yrel=native.yrel,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.jball.which = self.which
        event.jball.ball = self.ball
        event.jball.xrel = self.xrel
        event.jball.yrel = self.yrel
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class JoystickHatEvent(Event):
    type: EventType | int = EventType.JOYSTICK_HAT_MOTION
    which: int = 0
    hat: int = 0
    value: Hat = Hat.CENTERED

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.jhat
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            which=native.which,
            hat=native.hat,
            value=Hat(native.value),
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.jhat.which = self.which
        event.jhat.hat = self.hat
        event.jhat.value = self.value
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class JoystickButtonEvent(Event):
    type: EventType | int = EventType.JOYSTICK_BUTTON_DOWN
    which: int = 0
    button: int = 0
    down: bool = False

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.jbutton
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            which=native.which,
            button=native.button,
            down=native.down,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.jbutton.which = self.which
        event.jbutton.button = self.button
        event.jbutton.down = self.down
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class JoystickBatteryEvent(Event):
    type: EventType | int = EventType.JOYSTICK_BATTERY_UPDATED
    which: int = 0
    state: PowerState = PowerState.UNKNOWN
    #: Charge level in percent, or None if unknown.
    percent: int | None = None

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.jbattery
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            which=native.which,
            state=PowerState(native.state),
            percent=None if native.percent == -1 else native.percent,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.jbattery.which = self.which
        event.jbattery.state = self.state
        event.jbattery.percent = -1 if self.percent is None else self.percent
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class AudioDeviceEvent(Event):
    which: int = 0
    recording: bool = False

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.adevice
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            which=native.which,
            recording=native.recording,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.adevice.which = self.which
        event.adevice.recording = self.recording
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class CameraDeviceEvent(Event):
    which: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        return cls(type=_event_type(value.type), timestamp=value.cdevice.timestamp, which=value.cdevice.which)

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.cdevice.which = self.which
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class RenderEvent(Event):
    window_id: int = 0

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        return cls(type=_event_type(value.type), timestamp=value.render.timestamp, window_id=value.render.windowID)

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.render.windowID = self.window_id
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class ClipboardEvent(Event):
    type: EventType | int = EventType.CLIPBOARD_UPDATE
    #: Whether this application owns the clipboard content.
    owner: bool = False
    mime_types: tuple[str, ...] = ()

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.clipboard
        mime_types = ()
        if native.mime_types:
            mime_types = tuple(native.mime_types[i].decode("utf-8") for i in range(native.num_mime_types))
        return cls(type=_event_type(native.type), timestamp=native.timestamp, owner=native.owner, mime_types=mime_types)

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        event.clipboard.owner = self.owner
        event.clipboard.num_mime_types = len(self.mime_types)
        if self.mime_types:
            # The union keeps the array alive.
            event.clipboard.mime_types = (ctypes.c_char_p * len(self.mime_types))(
                *(m.encode("utf-8") for m in self.mime_types)
            )
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class DropEvent(Event):
    """
    A file, text or position dropped on a window.

    :ivar data: The file name for DROP_FILE, the text for DROP_TEXT, otherwise None.
    """

    type: EventType | int = EventType.DROP_FILE
    window_id: int = 0
    x: float = 0.0
    y: float = 0.0
    source: str | None = None
    data: str | None = None

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.drop
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            window_id=native.windowID,
            x=native.x,
            y=native.y,
            source=_decode(native.source),
            data=_decode(native.data),
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        native = event.drop
        native.windowID = self.window_id
        native.x, native.y = self.x, self.y
        native.source = _encode(self.source)
        native.data = _encode(self.data)
        return event


@dataclass(frozen=True, slots=True, kw_only=True)
class UserEvent(Event):
    """
    An application defined event. data1 and data2 are raw pointer values.
    """

    type: EventType | int = EventType.USER
    window_id: int = 0
    code: int = 0
    data1: int | None = None
    data2: int | None = None

    @classmethod
    def from_sdl(cls, value: NativeEvent) -> Self:
        native = value.user
        return cls(
            type=_event_type(native.type),
            timestamp=native.timestamp,
            window_id=native.windowID,
            code=native.code,
            data1=native.data1,
            data2=native.data2,
        )

    def to_sdl(self) -> NativeEvent:
        event = _native(self.type, self.timestamp)
        native = event.user
        native.windowID = self.window_id
        native.code = self.code
        native.data1 = self.data1
        native.data2 = self.data2
        return event


_CLASSES: dict[int, type[Event]] = {
    EventType.QUIT: QuitEvent,
    EventType.KEY_DOWN: KeyboardEvent,
    EventType.KEY_UP: KeyboardEvent,
    EventType.KEYBOARD_ADDED: KeyboardDeviceEvent,
    EventType.KEYBOARD_REMOVED: KeyboardDeviceEvent,
    EventType.MOUSE_MOTION: MouseMotionEvent,
    EventType.MOUSE_BUTTON_DOWN: MouseButtonEvent,
    EventType.MOUSE_BUTTON_UP: MouseButtonEvent,
    EventType.MOUSE_ADDED: MouseDeviceEvent,
    EventType.MOUSE_REMOVED: MouseDeviceEvent,
    EventType.JOYSTICK_AXIS_MOTION: JoystickAxisEvent,
    EventType.JOYSTICK_BALL_MOTION: JoystickBallEvent,
    EventType.JOYSTICK_HAT_MOTION: JoystickHatEvent,
    EventType.JOYSTICK_BUTTON_DOWN: JoystickButtonEvent,
    EventType.JOYSTICK_BUTTON_UP: JoystickButtonEvent,
    EventType.JOYSTICK_ADDED: JoystickDeviceEvent,
    EventType.JOYSTICK_REMOVED: JoystickDeviceEvent,
    EventType.JOYSTICK_BATTERY_UPDATED: JoystickBatteryEvent,
    EventType.JOYSTICK_UPDATE_COMPLETE: JoystickDeviceEvent,
    EventType.CLIPBOARD_UPDATE: ClipboardEvent,
    **{t: DisplayEvent for t in EventGroup.DISPLAY},
    **{t: WindowEvent for t in EventGroup.WINDOW},
    **{t: DropEvent for t in EventGroup.DRAG_AND_DROP},
    **{t: AudioDeviceEvent for t in EventGroup.AUDIO},
    **{t: CameraDeviceEvent for t in EventGroup.CAMERA},
    **{t: RenderEvent for t in EventGroup.RENDER},
}


def event_from_sdl(value: NativeEvent) -> Event:
    """
    Convert a native event into the matching event class.
    """
    if value.type in EventGroup.USER:
        return UserEvent.from_sdl(value)
    return _CLASSES.get(value.type, Event).from_sdl(value)


#: Called with each event. Returning False drops the event (filters only).
type EventFilter = Callable[[Event], bool]

_NativeEventFilter = ctypes.CFUNCTYPE(ctypes.c_bool, ctypes.c_void_p, ctypes.POINTER(NativeEvent))
_EventP = ctypes.POINTER(NativeEvent)

_SDL_PumpEvents = bind("SDL_PumpEvents", [], None)
_SDL_PeepEvents = bind(
    "SDL_PeepEvents", [_EventP, ctypes.c_int, ctypes.c_int, ctypes.c_uint32, ctypes.c_uint32], ctypes.c_int
)
_SDL_HasEvent = bind("SDL_HasEvent", [ctypes.c_uint32], ctypes.c_bool)
_SDL_HasEvents = bind("SDL_HasEvents", [ctypes.c_uint32, ctypes.c_uint32], ctypes.c_bool)
_SDL_FlushEvent = bind("SDL_FlushEvent", [ctypes.c_uint32], None)
_SDL_FlushEvents = bind("SDL_FlushEvents", [ctypes.c_uint32, ctypes.c_uint32], None)
_SDL_PollEvent = bind("SDL_PollEvent", [_EventP], ctypes.c_bool)
_SDL_WaitEvent = bind("SDL_WaitEvent", [_EventP], ctypes.c_bool)
_SDL_WaitEventTimeout = bind("SDL_WaitEventTimeout", [_EventP, ctypes.c_int32], ctypes.c_bool)
_SDL_PushEvent = bind("SDL_PushEvent", [_EventP], ctypes.c_bool)
_SDL_SetEventFilter = bind("SDL_SetEventFilter", [_NativeEventFilter, ctypes.c_void_p], None)
_SDL_AddEventWatch = bind("SDL_AddEventWatch", [_NativeEventFilter, ctypes.c_void_p], ctypes.c_bool)
_SDL_RemoveEventWatch = bind("SDL_RemoveEventWatch", [_NativeEventFilter, ctypes.c_void_p], None)
_SDL_FilterEvents = bind("SDL_FilterEvents", [_NativeEventFilter, ctypes.c_void_p], None)
_SDL_SetEventEnabled = bind("SDL_SetEventEnabled", [ctypes.c_uint32, ctypes.c_bool], None)
_SDL_EventEnabled = bind("SDL_EventEnabled", [ctypes.c_uint32], ctypes.c_bool)
_SDL_RegisterEvents = bind("SDL_RegisterEvents", [ctypes.c_int], ctypes.c_uint32)
_SDL_GetWindowFromEvent = bind("SDL_GetWindowFromEvent", [_EventP], _WindowP)


_filters = Registry[EventFilter]("sdlengine.events")
_current_filter = 0


@_NativeEventFilter
def _dispatch(userdata: int | None, event: ctypes._Pointer[NativeEvent]) -> bool:
    callback = _filters.get(userdata)
    if callback is None:
        return True

    try:
        return bool(callback(event_from_sdl(event.contents)))
    except Exception:
        logger.exception("Event callback failed. Keeping the event.")
        return True


def _range(kind: EventType | EventGroup | int) -> tuple[int, int]:
    if isinstance(kind, EventGroup):
        return kind.first, kind.last
    return kind, kind


def pump() -> None:
    """
    Gather events from the input devices into the queue.

    poll() and wait() pump implicitly. Call this on the thread that initialized the video subsystem.
    """
    _SDL_PumpEvents()


def poll() -> Event | None:
    """
    :return: The next event in the queue, or None if the queue is empty.
    """
    event = NativeEvent()
    if not _SDL_PollEvent(ctypes.byref(event)):
        return None
    return event_from_sdl(event)


def poll_all() -> Iterator[Event]:
    """
    Yield events until the queue is empty.
    """
    while (event := poll()) is not None:
        yield event


def wait() -> Event:
    """
    Block until an event is available.
    """
    event = NativeEvent()
    errors.check_bool(_SDL_WaitEvent(ctypes.byref(event)))
    return event_from_sdl(event)


def wait_timeout(timeout_ms: int) -> Event | None:
    """
    Wait until an event is available or the timeout elapsed.

    :return: The event, or None if the timeout elapsed first.
    """
    event = NativeEvent()
    if not _SDL_WaitEventTimeout(ctypes.byref(event), timeout_ms):
        return None
    return event_from_sdl(event)


def push(event: Event) -> bool:
    """
    Add an event to the queue. The event is copied.

    :return: False if the event was dropped by the filter.
    :raises SdlError: If the queue is full or the event could not be added.
    """
    errors.clear_error()
    if _SDL_PushEvent(ctypes.byref(event.to_sdl())):
        return True
    if errors.get_error() is None:
        return False
    raise errors.SdlError(errors.call_error_callback())


def peep_events(
    count: int,
    action: EventAction = EventAction.PEEK,
    kind: EventType | EventGroup | int = EventGroup.ALL,
) -> list[Event]:
    """
    Inspect or retrieve events without pumping.

    :param action: PEEK leaves the events in the queue, GET removes them.
    :param kind: Only events of this type or group.
    """
    if action == EventAction.ADD:
        errors.invalid_param_error("action")

    first, last = _range(kind)
    buffer = (NativeEvent * count)()
    received = errors.check(_SDL_PeepEvents(buffer, count, action, first, last), -1)
    return [event_from_sdl(buffer[i]) for i in range(received)]


def add_events(events: Sequence[Event]) -> int:
    """
    Add events to the back of the queue without running the filter.

    :return: The number of events added.
    """
    buffer = (NativeEvent * len(events))(*(e.to_sdl() for e in events))
    return errors.check(
        _SDL_PeepEvents(buffer, len(events), EventAction.ADD, EventGroup.ALL.first, EventGroup.ALL.last), -1
    )


def has(kind: EventType | EventGroup | int) -> bool:
    """
    Check for events of a type or group in the queue.
    """
    first, last = _range(kind)
    if first == last:
        return bool(_SDL_HasEvent(first))
    return bool(_SDL_HasEvents(first, last))


def flush(kind: EventType | EventGroup | int) -> None:
    """
    Remove every event of a type or group from the queue. Events that have not been pumped yet are not affected.
    """
    first, last = _range(kind)
    if first == last:
        _SDL_FlushEvent(first)
    else:
        _SDL_FlushEvents(first, last)


def set_enabled(event_type: EventType | int, enabled: bool) -> None:
    """
    Disabled event types are never added to the queue.
    """
    _SDL_SetEventEnabled(event_type, enabled)


def is_enabled(event_type: EventType | int) -> bool:
    return bool(_SDL_EventEnabled(event_type))


def register_events(count: int) -> int:
    """
    Reserve a range of user event types.

    :return: The first reserved type.
    """
    return errors.check_id(_SDL_RegisterEvents(count))


def get_window(event: Event) -> Window | None:
    """
    :return: The window the event refers to, or None.
    """
    pointer = _SDL_GetWindowFromEvent(ctypes.byref(event.to_sdl()))
    return Window(pointer) if pointer else None


def set_filter(callback: EventFilter | None) -> None:
    """
    Set the filter that decides which events are added to the queue.

    The filter may run on any thread that pushes events. None removes the filter.
    """
    global _current_filter

    previous = _current_filter
    if callback is None:
        _SDL_SetEventFilter(_NativeEventFilter(), None)
        _current_filter = 0
    else:
        _current_filter = _filters.add(callback)
        _SDL_SetEventFilter(_dispatch, _current_filter)
    _filters.pop(previous)


def get_filter() -> EventFilter | None:
    return _filters.get(_current_filter)


def filter_events(callback: EventFilter) -> None:
    """
    Run a callback on the current queue, removing the events it returns False for.
    """
    handle = _filters.add(callback)
    try:
        _SDL_FilterEvents(_dispatch, handle)
    finally:
        _filters.pop(handle)


def add_watch(callback: EventFilter) -> int:
    """
    Add a callback that sees every event as it is added to the queue. The return value is ignored.

    :return: A handle for remove_watch().
    """
    handle = _filters.add(callback)
    try:
        errors.check_bool(_SDL_AddEventWatch(_dispatch, handle))
    except errors.SdlError:
        _filters.pop(handle)
        raise
    return handle


def remove_watch(handle: int) -> None:
    if handle not in _filters:
        return
    _SDL_RemoveEventWatch(_dispatch, handle)
    _filters.pop(handle)
