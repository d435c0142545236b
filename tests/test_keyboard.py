# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the keyboard module."""

from collections.abc import Iterator

import pytest

from sdlengine import keyboard
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.errors import SdlError
from sdlengine.init import InitFlags, subsystems
from sdlengine.keyboard import Capitalization, Keymod, Scancode, TextInputProperties, TextInputType
from sdlengine.rect import Rect
from sdlengine.video import Window, WindowFlags


class RecordingGroup:
    def __init__(self) -> None:
        self.values: dict[str, object] = {}

    def set(self, name: str, value: object) -> None:
        self.values[name] = value


def test_scancode_to_keycode() -> None:
    assert keyboard.scancode_to_keycode(Scancode.F1) == 0x4000003A
    assert keyboard.scancode_to_keycode(Scancode.RCTRL) == 0x400000E4


def test_modifier_groups() -> None:
    assert Keymod.CTRL == Keymod.LCTRL | Keymod.RCTRL
    assert Keymod.LSHIFT in Keymod.SHIFT
    assert Keymod.LALT not in Keymod.GUI


def test_text_input_properties() -> None:
    group = RecordingGroup()
    props = TextInputProperties(
        type=TextInputType.TEXT_EMAIL, capitalization=Capitalization.NONE, multiline=True, android_inputtype=0x21
    )
    props.apply(group)  # type: ignore[arg-type]
    assert group.values == {
        "SDL.textinput.type": TextInputType.TEXT_EMAIL,
        "SDL.textinput.capitalization": Capitalization.NONE,
        "SDL.textinput.multiline": True,
        "SDL.textinput.android.inputtype": 0x21,
    }


@requires_library
class TestNativeKeyboard:
    @pytest.fixture(autouse=True)
    def video_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.VIDEO):
            yield

    @pytest.fixture
    def window(self) -> Iterator[Window]:
        with Window.create("Test", 64, 64, WindowFlags.HIDDEN) as window:
            yield window

    def test_key_names(self) -> None:
        space = keyboard.get_key_from_name("Space")
        assert space == ord(" ")
        assert keyboard.get_key_name(space) == "Space"

    def test_scancode_names(self) -> None:
        assert keyboard.get_scancode_from_name("Escape") == Scancode.ESCAPE
        assert keyboard.get_scancode_name(Scancode.ESCAPE) == "Escape"
        assert keyboard.get_scancode_name(Scancode.UNKNOWN) is None

    def test_unknown_names(self) -> None:
        with pytest.raises(SdlError):
            keyboard.get_scancode_from_name("No Such Key")
        with pytest.raises(SdlError):
            keyboard.get_key_from_name("No Such Key")

    def test_rename_scancode(self) -> None:
        keyboard.set_scancode_name(Scancode.F24, "Macro")
        try:
            assert keyboard.get_scancode_name(Scancode.F24) == "Macro"
            assert keyboard.get_scancode_from_name("Macro") == Scancode.F24
        finally:
            keyboard.set_scancode_name(Scancode.F24, "F24")

    def test_function_key_mapping(self) -> None:
        key = keyboard.get_key_from_scancode(Scancode.F1)
        assert key == keyboard.scancode_to_keycode(Scancode.F1)
        assert keyboard.get_scancode_from_key(key) == (Scancode.F1, Keymod.NONE)

    def test_unmapped_key(self) -> None:
        assert keyboard.get_key_from_scancode(Scancode.UNKNOWN) is None
        assert keyboard.get_scancode_from_key(keyboard.KEY_UNKNOWN) is None

    def test_mod_state(self) -> None:
        keyboard.set_mod_state(Keymod.CAPS)
        try:
            assert keyboard.get_mod_state() == Keymod.CAPS
        finally:
            keyboard.set_mod_state(Keymod.NONE)

    def test_state(self) -> None:
        keyboard.reset()
        state = keyboard.get_state()
        assert len(state) > Scancode.MODE
        assert not state[Scancode.A]

    def test_text_input(self, window: Window) -> None:
        keyboard.start_text_input(window)
        assert keyboard.text_input_active(window)
        keyboard.clear_composition(window)
        keyboard.stop_text_input(window)
        assert not keyboard.text_input_active(window)

    def test_text_input_with_properties(self, window: Window) -> None:
        keyboard.start_text_input(window, TextInputProperties(type=TextInputType.NUMBER))
        assert keyboard.text_input_active(window)
        keyboard.stop_text_input(window)

    def test_text_input_area(self, window: Window) -> None:
        keyboard.set_text_input_area(window, Rect(1, 2, 30, 10), 5)
        assert keyboard.get_text_input_area(window) == (Rect(1, 2, 30, 10), 5)
