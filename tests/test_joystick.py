# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the joystick module."""

import ctypes
from collections.abc import Iterator

import pytest

from sdlengine import joystick
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.errors import SdlError
from sdlengine.init import InitFlags, subsystems
from sdlengine.joystick import GUID, Hat, Joystick, JoystickType, VirtualJoystick

XBOX_GUID = "030000005e0400008e02000000007200"


class TestGUID:
    def test_string_round_trip(self) -> None:
        guid = GUID.from_string(XBOX_GUID)
        assert str(guid) == XBOX_GUID
        assert guid.data[4] == 0x5E

    def test_short_string_is_zero_padded(self) -> None:
        guid = GUID.from_string("0102")
        assert bytes(guid.data) == b"\x01\x02" + bytes(14)

    def test_invalid_string_stops_parsing(self) -> None:
        guid = GUID.from_string("01zz03")
        assert bytes(guid.data) == b"\x01" + bytes(15)

    def test_from_bytes(self) -> None:
        raw = bytes(range(16))
        assert bytes(GUID.from_bytes(raw).data) == raw

    def test_from_bytes_requires_16_bytes(self) -> None:
        with pytest.raises(ValueError):
            GUID.from_bytes(b"\x00")

    def test_equality(self) -> None:
        assert GUID.from_string(XBOX_GUID) == GUID.from_string(XBOX_GUID)
        assert GUID.from_string(XBOX_GUID) != GUID()
        assert len({GUID.from_string(XBOX_GUID), GUID.from_string(XBOX_GUID)}) == 1

    def test_layout(self) -> None:
        assert ctypes.sizeof(GUID) == 16


class TestVirtualJoystick:
    def test_to_sdl(self) -> None:
        desc = VirtualJoystick(name="Pad", type=JoystickType.WHEEL, naxes=2, nbuttons=3).to_sdl()
        assert desc.version == ctypes.sizeof(desc)
        assert desc.type == JoystickType.WHEEL
        assert (desc.naxes, desc.nbuttons, desc.nballs, desc.nhats) == (2, 3, 0, 0)
        assert desc.name == b"Pad"
        assert desc.Rumble is None

    @pytest.mark.skipif(ctypes.sizeof(ctypes.c_void_p) != 8, reason="64-bit layout")
    def test_layout(self) -> None:
        assert ctypes.sizeof(joystick._VirtualJoystickDesc) == 136


def test_hat_diagonals() -> None:
    assert Hat.RIGHTUP == Hat.RIGHT | Hat.UP
    assert Hat.LEFTDOWN == Hat.LEFT | Hat.DOWN


@requires_library
class TestNativeJoystick:
    @pytest.fixture(autouse=True)
    def joystick_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.JOYSTICK):
            yield

    @pytest.fixture
    def virtual_id(self) -> Iterator[int]:
        desc = VirtualJoystick(
            name="Virtual Pad",
            type=JoystickType.GAMEPAD,
            vendor_id=0x1234,
            product_id=0x5678,
            naxes=2,
            nbuttons=4,
            nballs=1,
            nhats=1,
        )
        joystick_id = joystick.attach_virtual(desc)
        yield joystick_id
        if joystick_id in joystick.get_joysticks():
            joystick.detach_virtual(joystick_id)

    def test_enumeration(self, virtual_id: int) -> None:
        assert joystick.has_joystick()
        assert virtual_id in joystick.get_joysticks()
        assert joystick.is_virtual(virtual_id)
        assert joystick.get_name_for_id(virtual_id) == "Virtual Pad"
        assert joystick.get_type_for_id(virtual_id) == JoystickType.GAMEPAD
        assert joystick.get_vendor_for_id(virtual_id) == 0x1234
        assert joystick.get_product_for_id(virtual_id) == 0x5678

    def test_guid_info(self, virtual_id: int) -> None:
        info = joystick.get_guid_info(joystick.get_guid_for_id(virtual_id))
        assert (info.vendor, info.product) == (0x1234, 0x5678)

    def test_detach(self, virtual_id: int) -> None:
        joystick.detach_virtual(virtual_id)
        assert virtual_id not in joystick.get_joysticks()

    def test_open(self, virtual_id: int) -> None:
        with Joystick.open(virtual_id) as js:
            assert js.id == virtual_id
            assert js.connected()
            assert js.name == "Virtual Pad"
            assert js.type == JoystickType.GAMEPAD
            assert js.guid == joystick.get_guid_for_id(virtual_id)
            assert (js.num_axes, js.num_buttons, js.num_balls, js.num_hats) == (2, 4, 1, 1)
            assert Joystick.from_id(virtual_id) == js

    def test_close_twice(self, virtual_id: int) -> None:
        js = Joystick.open(virtual_id)
        js.close()
        js.close()
        assert not js.pointer

    def test_virtual_inputs(self, virtual_id: int) -> None:
        with Joystick.open(virtual_id) as js:
            js.set_virtual_axis(0, joystick.AXIS_MIN)
            js.set_virtual_axis(1, 1000)
            js.set_virtual_button(2, True)
            js.set_virtual_hat(0, Hat.LEFTUP)
            joystick.update()

            assert js.get_axis(0) == joystick.AXIS_MIN
            assert js.get_axis(1) == 1000
            assert js.get_button(2)
            assert not js.get_button(0)
            assert js.get_hat(0) == Hat.LEFTUP

    def test_virtual_ball(self, virtual_id: int) -> None:
        with Joystick.open(virtual_id) as js:
            js.set_virtual_ball(0, 3, -4)
            joystick.update()
            assert js.get_ball(0) == (3, -4)

    def test_invalid_axis(self, virtual_id: int) -> None:
        with Joystick.open(virtual_id) as js, pytest.raises(SdlError):
            js.get_axis(5)

    def test_player_index(self, virtual_id: int) -> None:
        with Joystick.open(virtual_id) as js:
            js.player_index = 3
            assert js.player_index == 3
            assert Joystick.from_player_index(3) == js
            js.player_index = None
            assert js.player_index is None

    def test_events_enabled(self) -> None:
        previous = joystick.events_enabled()
        try:
            joystick.set_events_enabled(False)
            assert not joystick.events_enabled()
        finally:
            joystick.set_events_enabled(previous)

    def test_unsupported_rumble(self, virtual_id: int) -> None:
        with Joystick.open(virtual_id) as js:
            assert not js.capabilities.rumble
            with pytest.raises(SdlError):
                js.rumble(0xFFFF, 0xFFFF, 100)

    def test_locked(self) -> None:
        with joystick.locked():
            assert isinstance(joystick.get_joysticks(), list)
