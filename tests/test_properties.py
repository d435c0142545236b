# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for property groups."""

import ctypes
from collections.abc import Iterator

import pytest

from sdlengine import properties
from sdlengine._testutils import requires_library
from sdlengine.properties import Group, Type

pytestmark = requires_library


@pytest.fixture
def group() -> Iterator[Group]:
    with Group.create() as g:
        yield g


def test_typed_values(group: Group) -> None:
    group.set("number", 42)
    group.set("float", 0.5)
    group.set("string", "text")
    group.set("boolean", True)

    assert group.get_type("number") == Type.NUMBER
    assert group.get_type("float") == Type.FLOAT
    assert group.get_type("string") == Type.STRING
    assert group.get_type("boolean") == Type.BOOLEAN

    assert group.get("number") == 42
    assert group.get("float") == 0.5
    assert group.get("string") == "text"
    assert group.get("boolean") is True


def test_pointer(group: Group) -> None:
    target = ctypes.c_int(5)
    group.set("pointer", ctypes.c_void_p(ctypes.addressof(target)))
    assert group.get_type("pointer") == Type.POINTER
    assert group.get_pointer("pointer") == ctypes.addressof(target)


def test_unsupported_type(group: Group) -> None:
    with pytest.raises(TypeError):
        group.set("list", [1, 2, 3])  # type: ignore[arg-type]


def test_missing_values(group: Group) -> None:
    assert not group.has("missing")
    assert "missing" not in group
    assert group.get_type("missing") == Type.INVALID
    assert group.get("missing") is None
    assert group.get_number("missing", 7) == 7
    assert group.get_string("missing", "default") == "default"
    assert group.get_boolean("missing", True) is True


def test_clear(group: Group) -> None:
    group.set("number", 1)
    assert "number" in group
    group.set("number", None)
    assert "number" not in group

    group.set("number", 1)
    group.clear("number")
    assert not group.has("number")


def test_enumerate(group: Group) -> None:
    group.set("a", 1)
    group.set("b", "two")
    assert sorted(group.enumerate()) == ["a", "b"]
    assert group.get_all() == {"a": 1, "b": "two"}


def test_copy_to(group: Group) -> None:
    group.set("a", 1)
    with Group.create() as other:
        group.copy_to(other)
        assert other.get_number("a") == 1


def test_locked(group: Group) -> None:
    with group.locked() as g:
        g.set("a", 1)
    assert group.get_number("a") == 1


def test_global_group() -> None:
    assert properties.get_global() == properties.get_global()
