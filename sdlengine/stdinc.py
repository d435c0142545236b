# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
C types and SDL's memory allocation functions.

Memory returned by SDL that the caller has to release must be released with free().
"""

from __future__ import annotations

import ctypes
from typing import Any, NamedTuple

from . import errors
from ._dll import bind

__all__ = [
    "MemoryFunctions",
    "Sint8",
    "Sint16",
    "Sint32",
    "Sint64",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "calloc",
    "free",
    "get_num_allocations",
    "get_original_memory_functions",
    "malloc",
    "realloc",
    "take_array",
    "take_string",
]


Sint8 = ctypes.c_int8
Uint8 = ctypes.c_uint8
Sint16 = ctypes.c_int16
Uint16 = ctypes.c_uint16
Sint32 = ctypes.c_int32
Uint32 = ctypes.c_uint32
Sint64 = ctypes.c_int64
Uint64 = ctypes.c_uint64

MallocFunc = ctypes.CFUNCTYPE(ctypes.c_void_p, ctypes.c_size_t)
CallocFunc = ctypes.CFUNCTYPE(ctypes.c_void_p, ctypes.c_size_t, ctypes.c_size_t)
ReallocFunc = ctypes.CFUNCTYPE(ctypes.c_void_p, ctypes.c_void_p, ctypes.c_size_t)
FreeFunc = ctypes.CFUNCTYPE(None, ctypes.c_void_p)


_SDL_malloc = bind("SDL_malloc", [ctypes.c_size_t], ctypes.c_void_p)
_SDL_calloc = bind("SDL_calloc", [ctypes.c_size_t, ctypes.c_size_t], ctypes.c_void_p)
_SDL_realloc = bind("SDL_realloc", [ctypes.c_void_p, ctypes.c_size_t], ctypes.c_void_p)
_SDL_free = bind("SDL_free", [ctypes.c_void_p], None)
_SDL_GetNumAllocations = bind("SDL_GetNumAllocations", [], ctypes.c_int)
_SDL_GetOriginalMemoryFunctions = bind(
    "SDL_GetOriginalMemoryFunctions",
    [ctypes.POINTER(MallocFunc), ctypes.POINTER(CallocFunc), ctypes.POINTER(ReallocFunc), ctypes.POINTER(FreeFunc)],
    None,
)


class MemoryFunctions(NamedTuple):
    malloc: MallocFunc
    calloc: CallocFunc
    realloc: ReallocFunc
    free: FreeFunc


def malloc(size: int) -> int:
    """
    Allocate uninitialized memory.

    :return: The address of the allocated memory.
    """
    return errors.check_null(_SDL_malloc(size))


def calloc(num_members: int, size: int) -> int:
    """
    Allocate a zero-initialized array.
    """
    return errors.check_null(_SDL_calloc(num_members, size))


def realloc(mem: int | None, size: int) -> int:
    """
    Change the size of allocated memory.
    """
    return errors.check_null(_SDL_realloc(mem, size))


def free(mem: int | ctypes.c_void_p | None) -> None:
    """
    Free memory allocated by SDL. Passing None is a no-op.
    """
    _SDL_free(mem)


def get_num_allocations() -> int:
    """
    :return: The number of outstanding allocations, or -1 if allocation counting is disabled.
    """
    return _SDL_GetNumAllocations()


def get_original_memory_functions() -> MemoryFunctions:
    """
    Get the original set of SDL memory functions.
    """
    funcs = MallocFunc(), CallocFunc(), ReallocFunc(), FreeFunc()
    _SDL_GetOriginalMemoryFunctions(*(ctypes.byref(f) for f in funcs))
    return MemoryFunctions(*funcs)


def take_string(pointer: int | None, encoding: str = "utf-8") -> str:
    """
    Copies a NUL-terminated string allocated by SDL and frees the original.
    """
    try:
        return ctypes.string_at(pointer).decode(encoding)
    finally:
        free(pointer)


def _detach(item: Any) -> Any:
    # Indexing yields simple values as Python objects, everything else shares the array memory.
    if isinstance(item, ctypes._Pointer):
        return type(item).from_buffer_copy(item)
    return item


def take_array[T](pointer: ctypes._Pointer[T], count: int) -> list[T]:  # type: ignore[type-var]
    """
    Copies `count` elements of an array allocated by SDL and frees the original.

    Pointer elements are copied by value. What they point to must not live in the array allocation.
    """
    try:
        return [_detach(pointer[i]) for i in range(count)]
    finally:
        free(ctypes.cast(pointer, ctypes.c_void_p))
