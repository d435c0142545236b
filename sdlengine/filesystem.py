# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Filesystem paths and operations.

Paths are accepted as str or path-like objects and passed to SDL as UTF-8.
Directory paths returned by SDL end with the platform's path separator.
"""

import ctypes
from collections.abc import Callable
from enum import IntEnum, IntFlag
from logging import getLogger
from os import PathLike, fspath
from typing import NamedTuple, Self

from . import errors, stdinc
from ._dll import bind
from .time import Time

__all__ = [
    "EnumerationResult",
    "Folder",
    "GlobFlags",
    "NativePathInfo",
    "PathInfo",
    "PathType",
    "copy_file",
    "create_directory",
    "enumerate_directory",
    "get_base_path",
    "get_current_directory",
    "get_path_info",
    "get_pref_path",
    "get_user_folder",
    "glob_directory",
    "list_directory",
    "path_exists",
    "remove_path",
    "rename_path",
]


logger = getLogger(__name__)

type StrPath = str | PathLike[str]


class Folder(IntEnum):
    HOME = 0
    DESKTOP = 1
    DOCUMENTS = 2
    DOWNLOADS = 3
    MUSIC = 4
    PICTURES = 5
    PUBLICSHARE = 6
    SAVEDGAMES = 7
    SCREENSHOTS = 8
    TEMPLATES = 9
    VIDEOS = 10


class PathType(IntEnum):
    NONE = 0
    FILE = 1
    DIRECTORY = 2
    OTHER = 3


class GlobFlags(IntFlag):
    NONE = 0
    CASE_INSENSITIVE = 1 << 0


class EnumerationResult(IntEnum):
    CONTINUE = 0
    SUCCESS = 1
    FAILURE = 2


#: Called with the directory, which ends with a path separator, and the name of an entry.
type EnumerateCallback = Callable[[str, str], EnumerationResult]


class NativePathInfo(ctypes.Structure):
    _fields_ = [
        ("type", ctypes.c_int),
        ("size", ctypes.c_uint64),
        ("create_time", ctypes.c_int64),
        ("modify_time", ctypes.c_int64),
        ("access_time", ctypes.c_int64),
    ]


class PathInfo(NamedTuple):
    """
    Information about a path (SDL_PathInfo).

    Times the platform does not track are zero.
    """

    type: PathType
    size: int
    create_time: Time
    modify_time: Time
    access_time: Time

    @classmethod
    def from_sdl(cls, value: NativePathInfo) -> Self:
        return cls(
            PathType(value.type),
            value.size,
            Time(value.create_time),
            Time(value.modify_time),
            Time(value.access_time),
        )


_EnumerateDirectoryCallback = ctypes.CFUNCTYPE(ctypes.c_int, ctypes.c_void_p, ctypes.c_char_p, ctypes.c_char_p)

_SDL_GetBasePath = bind("SDL_GetBasePath", [], ctypes.c_char_p)
_SDL_GetPrefPath = bind("SDL_GetPrefPath", [ctypes.c_char_p, ctypes.c_char_p], ctypes.c_void_p)
_SDL_GetUserFolder = bind("SDL_GetUserFolder", [ctypes.c_int], ctypes.c_char_p)
_SDL_CreateDirectory = bind("SDL_CreateDirectory", [ctypes.c_char_p], ctypes.c_bool)
_SDL_EnumerateDirectory = bind(
    "SDL_EnumerateDirectory", [ctypes.c_char_p, _EnumerateDirectoryCallback, ctypes.c_void_p], ctypes.c_bool
)
_SDL_RemovePath = bind("SDL_RemovePath", [ctypes.c_char_p], ctypes.c_bool)
_SDL_RenamePath = bind("SDL_RenamePath", [ctypes.c_char_p, ctypes.c_char_p], ctypes.c_bool)
_SDL_CopyFile = bind("SDL_CopyFile", [ctypes.c_char_p, ctypes.c_char_p], ctypes.c_bool)
_SDL_GetPathInfo = bind("SDL_GetPathInfo", [ctypes.c_char_p, ctypes.POINTER(NativePathInfo)], ctypes.c_bool)
_SDL_GlobDirectory = bind(
    "SDL_GlobDirectory",
    [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_uint32, ctypes.POINTER(ctypes.c_int)],
    ctypes.POINTER(ctypes.c_char_p),
)
_SDL_GetCurrentDirectory = bind("SDL_GetCurrentDirectory", [], ctypes.c_void_p)


def _encode(path: StrPath) -> bytes:
    return fspath(path).encode("utf-8")


def get_base_path() -> str:
    """
    :return: The directory the application was run from.
    """
    return errors.check_null(_SDL_GetBasePath()).decode("utf-8")


def get_pref_path(org: str, app: str) -> str:
    """
    Get the user-and-app-specific directory to write settings and save files to.

    The directory is created if it does not exist yet.

    :param org: The name of your organization.
    :param app: The name of your application.
    """
    return stdinc.take_string(errors.check_null(_SDL_GetPrefPath(org.encode("utf-8"), app.encode("utf-8"))))


def get_user_folder(folder: Folder) -> str:
    """
    :raises SdlError: If the platform has no such folder.
    """
    return errors.check_null(_SDL_GetUserFolder(folder)).decode("utf-8")


def get_current_directory() -> str:
    return stdinc.take_string(errors.check_null(_SDL_GetCurrentDirectory()))


def create_directory(path: StrPath) -> None:
    """
    Create a directory. An existing directory is not an error.
    """
    errors.check_bool(_SDL_CreateDirectory(_encode(path)))


def enumerate_directory(path: StrPath, callback: EnumerateCallback) -> None:
    """
    Call back once for every entry of a directory, in no particular order.

    The callback stops the enumeration by returning SUCCESS or FAILURE.
    An exception raised by the callback is logged and counts as FAILURE.

    :raises SdlError: If the directory cannot be read, or the callback returned FAILURE.
    """

    def _call(_userdata: int | None, dirname: bytes, fname: bytes) -> int:
        try:
            return callback(dirname.decode("utf-8"), fname.decode("utf-8"))
        except Exception:
            logger.exception(f"Directory enumeration callback failed for {fname!r}.")
            return EnumerationResult.FAILURE

    native = _EnumerateDirectoryCallback(_call)
    errors.check_bool(_SDL_EnumerateDirectory(_encode(path), native, None))


def list_directory(path: StrPath) -> list[str]:
    """
    :return: The names of the entries of a directory, sorted.
    """
    names: list[str] = []

    def _collect(_dirname: str, name: str) -> EnumerationResult:
        names.append(name)
        return EnumerationResult.CONTINUE

    enumerate_directory(path, _collect)
    return sorted(names)


def remove_path(path: StrPath) -> None:
    """
    Remove a file or an empty directory. Removing a missing path is not an error.
    """
    errors.check_bool(_SDL_RemovePath(_encode(path)))


def rename_path(old_path: StrPath, new_path: StrPath) -> None:
    """
    Rename a file or directory, replacing new_path if it exists.
    """
    errors.check_bool(_SDL_RenamePath(_encode(old_path), _encode(new_path)))


def copy_file(old_path: StrPath, new_path: StrPath) -> None:
    """
    Copy a file, replacing new_path if it exists.
    """
    errors.check_bool(_SDL_CopyFile(_encode(old_path), _encode(new_path)))


def get_path_info(path: StrPath) -> PathInfo:
    """
    :raises SdlError: If the path does not exist.
    """
    info = NativePathInfo()
    errors.check_bool(_SDL_GetPathInfo(_encode(path), ctypes.byref(info)))
    return PathInfo.from_sdl(info)


def path_exists(path: StrPath) -> bool:
    return bool(_SDL_GetPathInfo(_encode(path), None))


def glob_directory(path: StrPath, pattern: str | None = None, flags: GlobFlags = GlobFlags.NONE) -> list[str]:
    """
    Find the paths below a directory that match a pattern.

    The pattern supports ``*`` for any run of characters and ``?`` for one character.
    Matches are relative to path and use ``/`` as separator. Without a pattern every path matches.
    """
    count = ctypes.c_int()
    encoded = None if pattern is None else pattern.encode("utf-8")
    array = errors.check_null(_SDL_GlobDirectory(_encode(path), encoded, flags, ctypes.byref(count)))
    return [item.decode("utf-8") for item in stdinc.take_array(array, count.value)]
