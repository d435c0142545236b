# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Querying the SDL version.
"""

import ctypes
from typing import NamedTuple, Self

from ._dll import bind

__all__ = ["MINIMUM", "Version", "get", "get_revision", "make"]


_SDL_GetVersion = bind("SDL_GetVersion", [], ctypes.c_int)
_SDL_GetRevision = bind("SDL_GetRevision", [], ctypes.c_char_p)


class Version(NamedTuple):
    major: int
    minor: int
    micro: int

    @classmethod
    def from_number(cls, value: int) -> Self:
        """
        Splits a packed version number (major * 1000000 + minor * 1000 + micro).
        """
        return cls(value // 1000000, (value // 1000) % 1000, value % 1000)

    @property
    def number(self) -> int:
        return make(self.major, self.minor, self.micro)

    def at_least(self, major: int, minor: int = 0, micro: int = 0) -> bool:
        return self >= (major, minor, micro)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.micro}"


def make(major: int, minor: int, micro: int) -> int:
    return major * 1000000 + minor * 1000 + micro


MINIMUM = Version(3, 2, 0)


def get() -> Version:
    """
    Get the version of SDL that is linked against your program.
    """
    return Version.from_number(_SDL_GetVersion())


def get_revision() -> str:
    """
    Get the code revision of SDL that is linked against your program.

    This is an arbitrary string and might be empty.
    """
    raw = _SDL_GetRevision()
    return "" if raw is None else raw.decode("utf-8")
