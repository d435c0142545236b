# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Initializing and shutting down SDL's subsystems.

    >>> with subsystems(InitFlags.VIDEO | InitFlags.EVENTS):
    ...     ...

Subsystems are reference counted by SDL: every init() must be paired with a
quit() of the same flags.
"""

import ctypes
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum, IntFlag
from logging import getLogger

from . import errors
from ._callbacks import Registry
from ._dll import bind

__all__ = [
    "AppMetadataProperty",
    "InitFlags",
    "MainThreadCallback",
    "get_app_metadata_property",
    "init",
    "is_main_thread",
    "quit",
    "run_on_main_thread",
    "set_app_metadata",
    "set_app_metadata_property",
    "shutdown",
    "subsystems",
    "was_init",
]


logger = getLogger(__name__)


class InitFlags(IntFlag):
    AUDIO = 0x00000010
    #: Implies EVENTS.
    VIDEO = 0x00000020
    #: Implies EVENTS.
    JOYSTICK = 0x00000200
    HAPTIC = 0x00001000
    #: Implies JOYSTICK.
    GAMEPAD = 0x00002000
    EVENTS = 0x00004000
    #: Implies EVENTS.
    SENSOR = 0x00008000
    #: Implies EVENTS.
    CAMERA = 0x00010000

    EVERYTHING = AUDIO | VIDEO | JOYSTICK | HAPTIC | GAMEPAD | EVENTS | SENSOR | CAMERA


class AppMetadataProperty(Enum):
    #: The human-readable name of the application, like "My Game 2: Bad Guy's Revenge!".
    NAME = "SDL.app.metadata.name"
    #: The version of the app that is running.
    VERSION = "SDL.app.metadata.version"
    #: A unique string that identifies this app, in reverse-domain format.
    IDENTIFIER = "SDL.app.metadata.identifier"
    CREATOR = "SDL.app.metadata.creator"
    COPYRIGHT = "SDL.app.metadata.copyright"
    URL = "SDL.app.metadata.url"
    #: The type of application: "game", "mediaplayer", "application" or any other string.
    TYPE = "SDL.app.metadata.type"


MainThreadCallback = ctypes.CFUNCTYPE(None, ctypes.c_void_p)

_SDL_Init = bind("SDL_Init", [ctypes.c_uint32], ctypes.c_bool)
_SDL_InitSubSystem = bind("SDL_InitSubSystem", [ctypes.c_uint32], ctypes.c_bool)
_SDL_QuitSubSystem = bind("SDL_QuitSubSystem", [ctypes.c_uint32], None)
_SDL_WasInit = bind("SDL_WasInit", [ctypes.c_uint32], ctypes.c_uint32)
_SDL_Quit = bind("SDL_Quit", [], None)
_SDL_IsMainThread = bind("SDL_IsMainThread", [], ctypes.c_bool)
_SDL_RunOnMainThread = bind("SDL_RunOnMainThread", [MainThreadCallback, ctypes.c_void_p, ctypes.c_bool], ctypes.c_bool)
_SDL_SetAppMetadata = bind("SDL_SetAppMetadata", [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_char_p], ctypes.c_bool)
_SDL_SetAppMetadataProperty = bind("SDL_SetAppMetadataProperty", [ctypes.c_char_p, ctypes.c_char_p], ctypes.c_bool)
_SDL_GetAppMetadataProperty = bind("SDL_GetAppMetadataProperty", [ctypes.c_char_p], ctypes.c_char_p)


def _encode(value: str | None) -> bytes | None:
    return None if value is None else value.encode("utf-8")


def init(flags: InitFlags) -> None:
    """
    Initialize the given subsystems.

    It is safe to call this more than once, each call must be paired with a call to quit().
    """
    logger.debug(f"Initializing {flags!r}")
    errors.check_bool(_SDL_InitSubSystem(flags))


def quit(flags: InitFlags) -> None:
    """
    Shut down specific SDL subsystems.
    """
    logger.debug(f"Shutting down {flags!r}")
    _SDL_QuitSubSystem(flags)


def was_init(flags: InitFlags = InitFlags(0)) -> InitFlags:
    """
    :param flags: Subsystems to query. Zero queries all of them.
    :return: The subsystems out of flags that are initialized.
    """
    return InitFlags(_SDL_WasInit(flags))


def shutdown() -> None:
    """
    Clean up all initialized subsystems.

    It is safe to call this function even in the case of errors in initialization.
    """
    logger.debug("Shutting down SDL")
    _SDL_Quit()


@contextmanager
def subsystems(flags: InitFlags) -> Iterator[InitFlags]:
    """
    Keeps the given subsystems initialized within the block.
    """
    init(flags)
    try:
        yield flags
    finally:
        quit(flags)


def is_main_thread() -> bool:
    """
    Return whether this is the main thread.
    """
    return bool(_SDL_IsMainThread())


_pending = Registry[Callable[[], None]]("sdlengine.init.run_on_main_thread")


@MainThreadCallback
def _run_pending(userdata: int | None) -> None:
    callback = _pending.pop(userdata)
    if callback is None:
        return

    try:
        callback()
    except Exception:
        logger.exception("Main thread callback failed.")


def run_on_main_thread(callback: Callable[[], None], wait: bool = False) -> None:
    """
    Call a function on the main thread during event processing.

    If this is called on the main thread, the callback is executed immediately.

    :param wait: Block until the callback has completed.
    """
    handle = _pending.add(callback)
    try:
        errors.check_bool(_SDL_RunOnMainThread(_run_pending, handle, wait))
    except errors.SdlError:
        _pending.pop(handle)
        raise


def set_app_metadata(name: str | None = None, version: str | None = None, identifier: str | None = None) -> None:
    """
    Specify basic metadata about your app.
    """
    errors.check_bool(_SDL_SetAppMetadata(_encode(name), _encode(version), _encode(identifier)))


def set_app_metadata_property(name: AppMetadataProperty, value: str | None) -> None:
    """
    Specify metadata about your app through a set of properties.

    :param value: The value or None to clear it.
    """
    errors.check_bool(_SDL_SetAppMetadataProperty(name.value.encode("utf-8"), _encode(value)))


def get_app_metadata_property(name: AppMetadataProperty) -> str | None:
    raw = _SDL_GetAppMetadataProperty(name.value.encode("utf-8"))
    return None if raw is None else raw.decode("utf-8")
