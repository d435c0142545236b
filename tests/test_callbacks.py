# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the callback handle registry."""

from sdlengine._callbacks import Registry


class TestRegistry:
    def test_handles_are_never_zero(self) -> None:
        registry = Registry[str]("test")
        assert registry.add("a") >= 1

    def test_handles_are_unique(self) -> None:
        registry = Registry[str]("test")
        assert registry.add("a") != registry.add("a")

    def test_get(self) -> None:
        registry = Registry[str]("test")
        handle = registry.add("value")
        assert registry.get(handle) == "value"
        assert handle in registry
        assert len(registry) == 1

    def test_get_unknown(self) -> None:
        registry = Registry[str]("test")
        assert registry.get(1234) is None
        assert registry.get(None) is None
        assert registry.get(0) is None

    def test_pop(self) -> None:
        registry = Registry[str]("test")
        handle = registry.add("value")
        assert registry.pop(handle) == "value"
        assert registry.pop(handle) is None
        assert handle not in registry

    def test_pop_falsy_handle_is_noop(self) -> None:
        registry = Registry[str]("test")
        registry.add("value")
        assert registry.pop(None) is None
        assert registry.pop(0) is None
        assert len(registry) == 1
