# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
The user's preferred locales.
"""

import ctypes
from typing import NamedTuple

from . import errors, stdinc
from ._dll import bind

__all__ = ["Locale", "get_preferred"]


class _Locale(ctypes.Structure):
    _fields_ = [("language", ctypes.c_char_p), ("country", ctypes.c_char_p)]


class Locale(NamedTuple):
    """
    A spoken language (ISO-639, "en") and an optional country (ISO-3166, "CA").
    """

    language: str
    country: str | None = None

    def __str__(self) -> str:
        return self.language if self.country is None else f"{self.language}_{self.country}"


_SDL_GetPreferredLocales = bind(
    "SDL_GetPreferredLocales", [ctypes.POINTER(ctypes.c_int)], ctypes.POINTER(ctypes.POINTER(_Locale))
)


def get_preferred() -> list[Locale]:
    """
    Report the user's preferred locales, most preferred first.

    This may query the operating system and can be slow. SDL sends a
    LOCALE_CHANGED event when the list changes.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetPreferredLocales(ctypes.byref(count)))
    try:
        return [
            Locale(
                array[i].contents.language.decode("utf-8"),
                None if array[i].contents.country is None else array[i].contents.country.decode("utf-8"),
            )
            for i in range(count.value)
        ]
    finally:
        stdinc.free(ctypes.cast(array, ctypes.c_void_p))
