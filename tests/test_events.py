# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the event queue and event conversion."""

import ctypes
import dataclasses
from collections.abc import Iterator

import pytest

from sdlengine import events
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.errors import SdlError
from sdlengine.events import (
    ClipboardEvent,
    DisplayEvent,
    DropEvent,
    Event,
    EventAction,
    EventGroup,
    EventType,
    JoystickAxisEvent,
    JoystickBatteryEvent,
    JoystickHatEvent,
    KeyboardEvent,
    MouseButtonEvent,
    NativeEvent,
    QuitEvent,
    UserEvent,
    WindowEvent,
)
from sdlengine.init import InitFlags, subsystems
from sdlengine.joystick import Hat
from sdlengine.power import PowerState


def convert(event: Event) -> Event:
    return events.event_from_sdl(event.to_sdl())


class TestEventGroup:
    def test_contains(self) -> None:
        assert EventType.WINDOW_RESIZED in EventGroup.WINDOW
        assert EventType.KEY_DOWN not in EventGroup.WINDOW
        assert 0x9000 in EventGroup.USER
        assert "text" not in EventGroup.ALL

    def test_bounds(self) -> None:
        assert EventGroup.USER.first == EventType.USER
        assert EventGroup.USER.last == EventType.LAST
        assert list(EventGroup.CLIPBOARD) == [EventType.CLIPBOARD_UPDATE]


class TestConversion:
    def test_native_layout(self) -> None:
        assert ctypes.sizeof(NativeEvent) == 128

    def test_quit(self) -> None:
        event = convert(QuitEvent(timestamp=10))
        assert event == QuitEvent(timestamp=10)

    def test_window(self) -> None:
        event = WindowEvent(type=EventType.WINDOW_RESIZED, window_id=3, data1=640, data2=480)
        assert convert(event) == event

    def test_display(self) -> None:
        event = DisplayEvent(type=EventType.DISPLAY_ADDED, display_id=2)
        assert convert(event) == event

    def test_keyboard(self) -> None:
        event = KeyboardEvent(window_id=1, scancode=4, key=ord("a"), mod=0x1, down=True, repeat=True)
        assert convert(event) == event

    def test_mouse_button(self) -> None:
        event = MouseButtonEvent(button=1, down=True, clicks=2, x=10.5, y=20.25)
        assert convert(event) == event

    def test_joystick_axis(self) -> None:
        event = JoystickAxisEvent(which=7, axis=1, value=-32768)
        assert convert(event) == event

    def test_joystick_hat(self) -> None:
        event = convert(JoystickHatEvent(which=7, hat=0, value=Hat.RIGHTUP))
        assert isinstance(event, JoystickHatEvent)
        assert event.value == Hat.RIGHT | Hat.UP

    def test_battery_without_percent(self) -> None:
        native = JoystickBatteryEvent(state=PowerState.ON_BATTERY).to_sdl()
        assert native.jbattery.percent == -1
        assert events.event_from_sdl(native) == JoystickBatteryEvent(state=PowerState.ON_BATTERY)

    def test_clipboard(self) -> None:
        event = ClipboardEvent(owner=True, mime_types=("text/plain", "image/png"))
        assert convert(event) == event

    def test_drop(self) -> None:
        event = DropEvent(type=EventType.DROP_TEXT, window_id=1, x=1.0, y=2.0, data="hello")
        assert convert(event) == event

    def test_user_range(self) -> None:
        event = convert(UserEvent(type=EventType.USER + 5, code=9, data1=0x1000))
        assert isinstance(event, UserEvent)
        assert event.type == EventType.USER + 5
        assert event.code == 9
        assert event.data1 == 0x1000
        assert event.data2 is None

    def test_unmapped_type_is_plain_event(self) -> None:
        event = convert(Event(type=EventType.FINGER_DOWN))
        assert type(event) is Event
        assert event.type == EventType.FINGER_DOWN

    def test_unknown_type_stays_int(self) -> None:
        event = convert(Event(type=0x7ABC))
        assert event.type == 0x7ABC
        assert not isinstance(event.type, EventType)

    def test_events_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            QuitEvent().timestamp = 5  # type: ignore[misc]


@requires_library
class TestQueue:
    @pytest.fixture(autouse=True)
    def event_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.EVENTS):
            events.pump()
            events.flush(EventGroup.ALL)
            yield
            events.set_filter(None)

    @pytest.fixture
    def user_type(self) -> int:
        return events.register_events(1)

    def test_register_events(self) -> None:
        first = events.register_events(2)
        assert first in EventGroup.USER
        assert events.register_events(1) >= first + 2

    def test_push_and_poll(self, user_type: int) -> None:
        assert events.push(UserEvent(type=user_type, code=42, data1=0x10))
        assert events.has(user_type)

        received = [e for e in events.poll_all() if e.type == user_type]
        assert len(received) == 1
        event = received[0]
        assert isinstance(event, UserEvent)
        assert (event.code, event.data1, event.data2) == (42, 0x10, None)
        assert event.timestamp > 0
        assert not events.has(user_type)

    def test_poll_empty(self) -> None:
        assert events.poll() is None

    def test_wait_timeout(self, user_type: int) -> None:
        assert events.wait_timeout(1) is None
        events.push(UserEvent(type=user_type))
        event = events.wait_timeout(1000)
        assert event is not None
        assert event.type == user_type

    def test_peep(self, user_type: int) -> None:
        added = events.add_events([UserEvent(type=user_type, code=1), UserEvent(type=user_type, code=2)])
        assert added == 2

        peeked = events.peep_events(10, EventAction.PEEK, user_type)
        assert [e.code for e in peeked if isinstance(e, UserEvent)] == [1, 2]

        taken = events.peep_events(1, EventAction.GET, user_type)
        assert [e.code for e in taken if isinstance(e, UserEvent)] == [1]
        assert len(events.peep_events(10, EventAction.PEEK, user_type)) == 1

    def test_peep_rejects_add(self) -> None:
        with pytest.raises(SdlError):
            events.peep_events(1, EventAction.ADD)

    def test_flush(self, user_type: int) -> None:
        events.push(UserEvent(type=user_type))
        events.flush(user_type)
        assert not events.has(user_type)

        events.push(UserEvent(type=user_type))
        events.flush(EventGroup.USER)
        assert not events.has(EventGroup.USER)

    def test_disabling_flushes_queued_events(self, user_type: int) -> None:
        events.push(UserEvent(type=user_type))
        events.set_enabled(user_type, False)
        try:
            assert not events.is_enabled(user_type)
            assert not events.has(user_type)
        finally:
            events.set_enabled(user_type, True)
        assert events.is_enabled(user_type)

    def test_filter(self, user_type: int) -> None:
        def _filter(event: Event) -> bool:
            return not (isinstance(event, UserEvent) and event.code == 1)

        events.set_filter(_filter)
        assert events.get_filter() is _filter

        assert not events.push(UserEvent(type=user_type, code=1))
        assert events.push(UserEvent(type=user_type, code=2))
        assert [e.code for e in events.peep_events(10, kind=user_type) if isinstance(e, UserEvent)] == [2]

        events.set_filter(None)
        assert events.get_filter() is None
        assert events.push(UserEvent(type=user_type, code=1))

    def test_failing_filter_keeps_event(self, user_type: int) -> None:
        def _filter(event: Event) -> bool:
            raise RuntimeError

        events.set_filter(_filter)
        assert events.push(UserEvent(type=user_type))
        assert events.has(user_type)

    def test_filter_events(self, user_type: int) -> None:
        events.add_events([UserEvent(type=user_type, code=c) for c in range(4)])
        events.filter_events(lambda e: not isinstance(e, UserEvent) or e.code % 2 == 0)
        assert [e.code for e in events.peep_events(10, kind=user_type) if isinstance(e, UserEvent)] == [0, 2]

    def test_watch(self, user_type: int) -> None:
        seen: list[Event] = []

        def _watch(event: Event) -> bool:
            seen.append(event)
            return False

        handle = events.add_watch(_watch)
        try:
            assert events.push(UserEvent(type=user_type, code=3))
        finally:
            events.remove_watch(handle)
        events.push(UserEvent(type=user_type, code=4))

        assert [e.code for e in seen if isinstance(e, UserEvent)] == [3]
        assert events.has(user_type)

    def test_remove_unknown_watch(self) -> None:
        events.remove_watch(123456789)

    def test_event_without_window(self, user_type: int) -> None:
        assert events.get_window(UserEvent(type=user_type)) is None
