# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.properties wraps SDL's property groups.

A property group is a set of named values identified by a numeric id.
Values are typed: pointers, strings, numbers (64-bit integers), floats and booleans.

    >>> with Group.create() as props:
    ...     props.set("answer", 42)
    ...     props.get("answer")
    42

Pointers are passed as ctypes.c_void_p so they can't be mistaken for numbers.
"""

from __future__ import annotations

import ctypes
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from enum import IntEnum
from logging import getLogger
from types import TracebackType
from typing import Self

from . import errors
from ._dll import bind

__all__ = ["Group", "PropertyValue", "Type", "get_global"]


logger = getLogger(__name__)

type PropertyValue = bool | int | float | str | ctypes.c_void_p


class Type(IntEnum):
    INVALID = 0
    POINTER = 1
    STRING = 2
    NUMBER = 3
    FLOAT = 4
    BOOLEAN = 5


_PropertiesID = ctypes.c_uint32
EnumeratePropertiesCallback = ctypes.CFUNCTYPE(None, ctypes.c_void_p, _PropertiesID, ctypes.c_char_p)

_SDL_GetGlobalProperties = bind("SDL_GetGlobalProperties", [], _PropertiesID)
_SDL_CreateProperties = bind("SDL_CreateProperties", [], _PropertiesID)
_SDL_CopyProperties = bind("SDL_CopyProperties", [_PropertiesID, _PropertiesID], ctypes.c_bool)
_SDL_LockProperties = bind("SDL_LockProperties", [_PropertiesID], ctypes.c_bool)
_SDL_UnlockProperties = bind("SDL_UnlockProperties", [_PropertiesID], None)
_SDL_SetPointerProperty = bind(
    "SDL_SetPointerProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_void_p], ctypes.c_bool
)
_SDL_SetStringProperty = bind(
    "SDL_SetStringProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_char_p], ctypes.c_bool
)
_SDL_SetNumberProperty = bind("SDL_SetNumberProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_int64], ctypes.c_bool)
_SDL_SetFloatProperty = bind("SDL_SetFloatProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_float], ctypes.c_bool)
_SDL_SetBooleanProperty = bind("SDL_SetBooleanProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_bool], ctypes.c_bool)
_SDL_HasProperty = bind("SDL_HasProperty", [_PropertiesID, ctypes.c_char_p], ctypes.c_bool)
_SDL_GetPropertyType = bind("SDL_GetPropertyType", [_PropertiesID, ctypes.c_char_p], ctypes.c_int)
_SDL_GetPointerProperty = bind(
    "SDL_GetPointerProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_void_p], ctypes.c_void_p
)
_SDL_GetStringProperty = bind(
    "SDL_GetStringProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_char_p], ctypes.c_char_p
)
_SDL_GetNumberProperty = bind("SDL_GetNumberProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_int64], ctypes.c_int64)
_SDL_GetFloatProperty = bind("SDL_GetFloatProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_float], ctypes.c_float)
_SDL_GetBooleanProperty = bind("SDL_GetBooleanProperty", [_PropertiesID, ctypes.c_char_p, ctypes.c_bool], ctypes.c_bool)
_SDL_ClearProperty = bind("SDL_ClearProperty", [_PropertiesID, ctypes.c_char_p], ctypes.c_bool)
_SDL_EnumerateProperties = bind(
    "SDL_EnumerateProperties", [_PropertiesID, EnumeratePropertiesCallback, ctypes.c_void_p], ctypes.c_bool
)
_SDL_DestroyProperties = bind("SDL_DestroyProperties", [_PropertiesID], None)


def _name(name: str) -> bytes:
    return name.encode("utf-8")


class Group(AbstractContextManager["Group"]):
    """
    A group of properties.

    Groups created with create() are destroyed when leaving the with-block.
    Groups owned by other SDL objects must not be destroyed by the application.
    """

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Group) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"<Group {self.value}>"

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    @classmethod
    def create(cls) -> Self:
        """
        Create a group of properties.
        """
        return cls(errors.check_id(_SDL_CreateProperties()))

    def destroy(self) -> None:
        """
        Destroy a group of properties.

        All properties are deleted and their cleanup functions will be called, if any.
        """
        _SDL_DestroyProperties(self.value)

    def copy_to(self, dst: Group) -> None:
        """
        Copy every property of this group to another group.

        Pointer properties with cleanup functions are not copied.
        """
        errors.check_bool(_SDL_CopyProperties(self.value, dst.value))

    def lock(self) -> None:
        errors.check_bool(_SDL_LockProperties(self.value))

    def unlock(self) -> None:
        _SDL_UnlockProperties(self.value)

    @contextmanager
    def locked(self) -> Iterator[Self]:
        """
        Holds the lock of the group within the block.
        """
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    def set(self, name: str, value: PropertyValue | None) -> None:
        """
        Set a property, picking the property type from the Python type.

        :param name: The name of the property.
        :param value: The new value. None clears the property.
        """
        key = _name(name)
        if value is None:
            result = _SDL_ClearProperty(self.value, key)
        elif isinstance(value, bool):
            result = _SDL_SetBooleanProperty(self.value, key, value)
        elif isinstance(value, int):
            result = _SDL_SetNumberProperty(self.value, key, value)
        elif isinstance(value, float):
            result = _SDL_SetFloatProperty(self.value, key, value)
        elif isinstance(value, str):
            result = _SDL_SetStringProperty(self.value, key, value.encode("utf-8"))
        elif isinstance(value, ctypes.c_void_p):
            result = _SDL_SetPointerProperty(self.value, key, value)
        else:
            raise TypeError(f"Unsupported property type: {type(value).__name__}")

        errors.check_bool(result)

    def get_type(self, name: str) -> Type:
        return Type(_SDL_GetPropertyType(self.value, _name(name)))

    def has(self, name: str) -> bool:
        return bool(_SDL_HasProperty(self.value, _name(name)))

    def get(self, name: str) -> PropertyValue | None:
        """
        Get a property, converting it according to its type.

        :return: The value or None if the property is not set.
        """
        key = _name(name)
        match self.get_type(name):
            case Type.POINTER:
                return ctypes.c_void_p(_SDL_GetPointerProperty(self.value, key, None))
            case Type.STRING:
                raw = _SDL_GetStringProperty(self.value, key, None)
                return None if raw is None else raw.decode("utf-8")
            case Type.NUMBER:
                return _SDL_GetNumberProperty(self.value, key, 0)
            case Type.FLOAT:
                return _SDL_GetFloatProperty(self.value, key, 0.0)
            case Type.BOOLEAN:
                return bool(_SDL_GetBooleanProperty(self.value, key, False))
            case _:
                return None

    def get_pointer(self, name: str) -> int | None:
        return _SDL_GetPointerProperty(self.value, _name(name), None)

    def get_number(self, name: str, default: int = 0) -> int:
        return _SDL_GetNumberProperty(self.value, _name(name), default)

    def get_string(self, name: str, default: str | None = None) -> str | None:
        raw = _SDL_GetStringProperty(self.value, _name(name), None)
        return default if raw is None else raw.decode("utf-8")

    def get_float(self, name: str, default: float = 0.0) -> float:
        return _SDL_GetFloatProperty(self.value, _name(name), default)

    def get_boolean(self, name: str, default: bool = False) -> bool:
        return bool(_SDL_GetBooleanProperty(self.value, _name(name), default))

    def clear(self, name: str) -> None:
        errors.check_bool(_SDL_ClearProperty(self.value, _name(name)))

    def enumerate(self) -> list[str]:
        """
        :return: The names of all properties in the group.
        """
        names: list[str] = []

        def _collect(_userdata: int | None, _props: int, name: bytes | None) -> None:
            try:
                if name is not None:
                    names.append(name.decode("utf-8"))
            except Exception:
                logger.exception("Failed to collect a property name.")

        callback = EnumeratePropertiesCallback(_collect)
        errors.check_bool(_SDL_EnumerateProperties(self.value, callback, None))
        return names

    def get_all(self) -> dict[str, PropertyValue | None]:
        """
        :return: A snapshot of every property of the group.
        """
        return {name: self.get(name) for name in self.enumerate()}


def get_global() -> Group:
    """
    Get the global SDL properties.
    """
    return Group(errors.check_id(_SDL_GetGlobalProperties()))
