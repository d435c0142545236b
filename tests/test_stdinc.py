# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the stdinc module."""

import ctypes

import pytest

from sdlengine import stdinc
from sdlengine._testutils import requires_library
from sdlengine.errors import SdlError

pytestmark = requires_library


def test_calloc_is_zeroed() -> None:
    address = stdinc.calloc(4, 2)
    try:
        assert ctypes.string_at(address, 8) == bytes(8)
    finally:
        stdinc.free(address)


def test_realloc_keeps_contents() -> None:
    address = stdinc.malloc(4)
    ctypes.memmove(address, b"abcd", 4)
    address = stdinc.realloc(address, 64)
    try:
        assert ctypes.string_at(address, 4) == b"abcd"
    finally:
        stdinc.free(address)


def test_free_none() -> None:
    stdinc.free(None)


def test_take_string() -> None:
    address = stdinc.malloc(6)
    ctypes.memmove(address, b"hello\0", 6)
    assert stdinc.take_string(address) == "hello"


def test_take_array_of_values() -> None:
    address = stdinc.malloc(3 * ctypes.sizeof(ctypes.c_uint32))
    array = ctypes.cast(address, ctypes.POINTER(ctypes.c_uint32))
    for i, value in enumerate((7, 8, 9)):
        array[i] = value
    assert stdinc.take_array(array, 3) == [7, 8, 9]


def test_take_array_copies_pointers() -> None:
    target = ctypes.c_int(42)
    pointer_type = ctypes.POINTER(ctypes.c_int)
    address = stdinc.malloc(ctypes.sizeof(pointer_type))
    array = ctypes.cast(address, ctypes.POINTER(pointer_type))
    array[0] = ctypes.pointer(target)
    (copied,) = stdinc.take_array(array, 1)
    assert copied.contents.value == 42


def test_original_memory_functions() -> None:
    functions = stdinc.get_original_memory_functions()
    assert all(functions)


def test_allocation_count() -> None:
    assert stdinc.get_num_allocations() >= -1


def test_huge_allocation_fails() -> None:
    with pytest.raises(SdlError):
        stdinc.malloc(ctypes.c_size_t(-1).value)
