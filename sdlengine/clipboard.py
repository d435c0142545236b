# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Clipboard access. All functions should be called on the main thread
while the video subsystem is initialized.
"""

import ctypes
from collections.abc import Callable, Sequence
from logging import getLogger

from . import errors, stdinc
from ._callbacks import Registry
from ._dll import bind

__all__ = [
    "DataProvider",
    "clear_data",
    "get_data",
    "get_mime_types",
    "get_primary_selection_text",
    "get_text",
    "has_data",
    "has_primary_selection_text",
    "has_text",
    "set_data",
    "set_primary_selection_text",
    "set_text",
]


logger = getLogger(__name__)

#: Returns the data for the requested mime-type, or None to offer nothing.
type DataProvider = Callable[[str], bytes | None]

_NativeDataCallback = ctypes.CFUNCTYPE(ctypes.c_void_p, ctypes.c_void_p, ctypes.c_char_p, ctypes.POINTER(ctypes.c_size_t))
_NativeCleanupCallback = ctypes.CFUNCTYPE(None, ctypes.c_void_p)

_SDL_SetClipboardText = bind("SDL_SetClipboardText", [ctypes.c_char_p], ctypes.c_bool)
_SDL_GetClipboardText = bind("SDL_GetClipboardText", [], ctypes.c_void_p)
_SDL_HasClipboardText = bind("SDL_HasClipboardText", [], ctypes.c_bool)
_SDL_SetPrimarySelectionText = bind("SDL_SetPrimarySelectionText", [ctypes.c_char_p], ctypes.c_bool)
_SDL_GetPrimarySelectionText = bind("SDL_GetPrimarySelectionText", [], ctypes.c_void_p)
_SDL_HasPrimarySelectionText = bind("SDL_HasPrimarySelectionText", [], ctypes.c_bool)
_SDL_SetClipboardData = bind(
    "SDL_SetClipboardData",
    [_NativeDataCallback, _NativeCleanupCallback, ctypes.c_void_p, ctypes.POINTER(ctypes.c_char_p), ctypes.c_size_t],
    ctypes.c_bool,
)
_SDL_ClearClipboardData = bind("SDL_ClearClipboardData", [], ctypes.c_bool)
_SDL_GetClipboardData = bind("SDL_GetClipboardData", [ctypes.c_char_p, ctypes.POINTER(ctypes.c_size_t)], ctypes.c_void_p)
_SDL_HasClipboardData = bind("SDL_HasClipboardData", [ctypes.c_char_p], ctypes.c_bool)
_SDL_GetClipboardMimeTypes = bind(
    "SDL_GetClipboardMimeTypes", [ctypes.POINTER(ctypes.c_size_t)], ctypes.POINTER(ctypes.c_char_p)
)


class _Offer:
    __slots__ = ("buffer", "provider")

    def __init__(self, provider: DataProvider) -> None:
        self.provider = provider
        # SDL reads the returned data after the callback returns.
        self.buffer: ctypes.Array[ctypes.c_char] | None = None


_offers = Registry[_Offer]("sdlengine.clipboard")


@_NativeDataCallback
def _provide(userdata: int | None, mime_type: bytes | None, size: "ctypes._Pointer[ctypes.c_size_t]") -> int | None:
    size[0] = 0
    offer = _offers.get(userdata)
    if offer is None or mime_type is None:
        return None

    try:
        data = offer.provider(mime_type.decode("utf-8"))
    except Exception:
        logger.exception(f"Clipboard provider failed for {mime_type!r}.")
        return None

    if not data:
        return None

    offer.buffer = ctypes.create_string_buffer(data, len(data))
    size[0] = len(data)
    return ctypes.addressof(offer.buffer)


@_NativeCleanupCallback
def _cleanup(userdata: int | None) -> None:
    _offers.pop(userdata)


def set_text(text: str) -> None:
    errors.check_bool(_SDL_SetClipboardText(text.encode("utf-8")))


def get_text() -> str:
    """
    :return: The clipboard text, or an empty string if there is none.
    """
    return stdinc.take_string(errors.check_null(_SDL_GetClipboardText()))


def has_text() -> bool:
    return bool(_SDL_HasClipboardText())


def set_primary_selection_text(text: str) -> None:
    errors.check_bool(_SDL_SetPrimarySelectionText(text.encode("utf-8")))


def get_primary_selection_text() -> str:
    return stdinc.take_string(errors.check_null(_SDL_GetPrimarySelectionText()))


def has_primary_selection_text() -> bool:
    return bool(_SDL_HasPrimarySelectionText())


def set_data(provider: DataProvider, mime_types: Sequence[str]) -> None:
    """
    Offer clipboard data to the operating system.

    The provider is called lazily whenever another application requests data
    for one of the offered mime-types. It stays registered until the
    clipboard is cleared or replaced.
    """
    encoded = (ctypes.c_char_p * len(mime_types))(*(m.encode("utf-8") for m in mime_types))
    handle = _offers.add(_Offer(provider))
    try:
        errors.check_bool(_SDL_SetClipboardData(_provide, _cleanup, handle, encoded, len(mime_types)))
    except errors.SdlError:
        _offers.pop(handle)
        raise


def clear_data() -> None:
    errors.check_bool(_SDL_ClearClipboardData())


def get_data(mime_type: str) -> bytes:
    size = ctypes.c_size_t()
    pointer = errors.check_null(_SDL_GetClipboardData(mime_type.encode("utf-8"), ctypes.byref(size)))
    try:
        return ctypes.string_at(pointer, size.value)
    finally:
        stdinc.free(pointer)


def has_data(mime_type: str) -> bool:
    return bool(_SDL_HasClipboardData(mime_type.encode("utf-8")))


def get_mime_types() -> list[str]:
    """
    :return: The mime-types currently available on the clipboard.
    """
    count = ctypes.c_size_t()
    array = errors.check_null(_SDL_GetClipboardMimeTypes(ctypes.byref(count)))
    return [m.decode("utf-8") for m in stdinc.take_array(array, count.value)]
