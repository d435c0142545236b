# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Locates and loads the SDL3 shared library.

Loading is deferred until the first native call, so every module of this
package can be imported on machines without SDL3.

The library is searched in this order:

- SDLENGINE_LIBRARY:      Full path to the library file. No other candidate is tried.
- SDLENGINE_LIBRARY_PATH: Directories (separated by os.pathsep) searched for the library.
- ctypes.util.find_library("SDL3")
- The plain platform name, leaving the search to the dynamic loader.
"""

from __future__ import annotations

import ctypes
import os
import sys
import threading
import warnings
from collections.abc import Sequence
from ctypes.util import find_library
from logging import getLogger
from typing import Any

__all__ = [
    "ENV_LIBRARY",
    "ENV_LIBRARY_PATH",
    "Function",
    "Library",
    "LibraryNotFoundError",
    "LibraryWarning",
    "bind",
    "get_library",
    "is_available",
]


logger = getLogger(__name__)

ENV_LIBRARY = "SDLENGINE_LIBRARY"
ENV_LIBRARY_PATH = "SDLENGINE_LIBRARY_PATH"

_MINIMUM_VERSION = (3, 2, 0)


class LibraryNotFoundError(OSError):
    """
    Raised when no usable SDL3 library could be loaded.
    """


class LibraryWarning(Warning):
    pass


def _platform_names() -> tuple[str, list[str]]:
    if sys.platform == "win32":
        return "{}.dll", ["SDL3.dll"]
    if sys.platform == "darwin":
        return "lib{}.dylib", ["libSDL3.0.dylib", "libSDL3.dylib"]
    return "lib{}.so", ["libSDL3.so.0", "libSDL3.so"]


def _candidates() -> list[str]:
    explicit = os.environ.get(ENV_LIBRARY)
    if explicit:
        return [explicit]

    pattern, plain = _platform_names()
    results: list[str] = []

    search_path = os.environ.get(ENV_LIBRARY_PATH)
    if search_path:
        for directory in search_path.split(os.pathsep):
            for name in [pattern.format("SDL3"), *plain]:
                candidate = os.path.join(directory, name)
                if os.path.exists(candidate) and candidate not in results:
                    results.append(candidate)

    found = find_library("SDL3")
    if found and found not in results:
        results.append(found)

    results.extend(name for name in plain if name not in results)
    return results


class Library:
    """
    A loaded SDL3 library.
    """

    __slots__ = ("_dll", "path")

    def __init__(self, path: str) -> None:
        self._dll = ctypes.CDLL(path)
        self.path = path

    def function(self, name: str, argtypes: Sequence[Any] | None, restype: Any) -> Any:
        """
        Binds the argument and return types to the given symbol.

        :param name: The name of the exported C function.
        :param argtypes: The ctypes argument types or None to leave them unchecked.
        :param restype: The ctypes return type.
        :return: The configured ctypes function.
        """
        func = getattr(self._dll, name, None)
        if func is None:
            raise AttributeError(f"Function {name!r} not found in {self.path!r}")

        if argtypes is not None:
            func.argtypes = list(argtypes)
        func.restype = restype
        return func

    def version(self) -> tuple[int, int, int]:
        get_version = self.function("SDL_GetVersion", [], ctypes.c_int)
        value = get_version()
        return value // 1000000, (value // 1000) % 1000, value % 1000


_library: Library | None = None
_lock = threading.Lock()


def _load() -> Library:
    candidates = _candidates()
    for candidate in candidates:
        try:
            library = Library(candidate)
        except OSError as e:
            if os.path.exists(candidate):
                warnings.warn(f"Could not load {candidate!r}: {e}", LibraryWarning, stacklevel=3)
            else:
                logger.debug(f"Skipping library candidate {candidate!r}: {e}")
            continue

        try:
            version = library.version()
        except AttributeError:
            logger.debug(f"{candidate!r} does not export SDL_GetVersion, skipping.")
            continue

        logger.debug("Loaded SDL %d.%d.%d from %r", *version, candidate)
        if version < _MINIMUM_VERSION:
            warnings.warn(
                "SDL {}.{}.{} is older than the supported minimum {}.{}.{}".format(*version, *_MINIMUM_VERSION),
                LibraryWarning,
                stacklevel=3,
            )
        return library

    raise LibraryNotFoundError(
        f"Could not find a usable SDL3 library (tried: {', '.join(candidates) or 'nothing'}). "
        f"Set {ENV_LIBRARY} or {ENV_LIBRARY_PATH} to point to it."
    )


def get_library() -> Library:
    """
    :return: The loaded SDL3 library, loading it if required.
    """
    global _library
    if _library is not None:
        return _library

    with _lock:
        if _library is None:
            _library = _load()
        return _library


def is_available() -> bool:
    """
    :return: True if the SDL3 library can be loaded.
    """
    try:
        get_library()
    except LibraryNotFoundError:
        return False
    return True


class Function:
    """
    A native function that is resolved on its first call.
    """

    __slots__ = ("_func", "argtypes", "name", "restype")

    def __init__(self, name: str, argtypes: Sequence[Any] | None, restype: Any) -> None:
        self.name = name
        self.argtypes = argtypes
        self.restype = restype
        self._func: Any = None

    def resolve(self) -> Any:
        if self._func is None:
            self._func = get_library().function(self.name, self.argtypes, self.restype)
        return self._func

    def __call__(self, *args: Any) -> Any:
        return self.resolve()(*args)

    def __repr__(self) -> str:
        return f"<Function {self.name}>"


def bind(name: str, argtypes: Sequence[Any] | None = None, restype: Any = None) -> Function:
    """
    Declares a native SDL function.

    :param name: The name of the exported C function.
    :param argtypes: The ctypes argument types. Leave as None for variadic functions.
    :param restype: The ctypes return type. None means void.
    """
    return Function(name, argtypes, restype)
