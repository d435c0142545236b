# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.errors maps SDL's error reporting onto Python exceptions.

SDL reports failures through sentinel return values (false, NULL, -1 or 0)
and keeps a human-readable message in a per-thread error string, which stays
set until the next error or until it is cleared.

Every wrapper in this package runs the native result through one of the
check-functions of this module:

    >>> from sdlengine import errors
    >>> errors.check_bool(native_call())

If the result is the failure sentinel, the error callback (if any) is invoked
with the current message and SdlError is raised.

The error callback is stored in a CallbackStore. Three stores are provided:

- ThreadLocalStore is the default. Like SDL's own error string, a callback
  registered on one thread only observes failures on that very thread.

- GlobalStore shares a single callback between all threads.

- ContextVarStore is useful when you are using event-loops like asyncio.

Switch the store with set_store(). To scope a callback to a block, use
use_callback():

    >>> with errors.use_callback(print):
    ...     errors.check_bool(native_call())
"""

from __future__ import annotations

import ctypes
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, NoReturn

from ._dll import bind

__all__ = [
    "CallbackStore",
    "ContextVarStore",
    "ErrorCallback",
    "GlobalStore",
    "SdlError",
    "StreamError",
    "StreamIOError",
    "StreamNotReady",
    "StreamReadOnly",
    "StreamWriteOnly",
    "ThreadLocalStore",
    "call_error_callback",
    "check",
    "check_bool",
    "check_id",
    "check_null",
    "clear_error",
    "get_callback",
    "get_error",
    "get_store",
    "invalid_param_error",
    "out_of_memory",
    "set_callback",
    "set_error",
    "set_store",
    "unsupported",
    "use_callback",
]


type ErrorCallback = Callable[[str | None], None]


_SDL_GetError = bind("SDL_GetError", [], ctypes.c_char_p)
_SDL_ClearError = bind("SDL_ClearError", [], ctypes.c_bool)
_SDL_OutOfMemory = bind("SDL_OutOfMemory", [], ctypes.c_bool)
# Variadic: the argument types are left unchecked.
_SDL_SetError = bind("SDL_SetError", None, ctypes.c_bool)


class SdlError(Exception):
    """
    Raised when a native SDL call reports a failure.
    """

    #: The SDL error message at the time of the failure (if any).
    message: str | None

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "SDL call failed")
        self.message = message


class StreamError(SdlError):
    """
    Raised when an I/O stream reports a failing status.
    """


class StreamIOError(StreamError):
    """
    Read or write I/O error.
    """


class StreamNotReady(StreamError):
    """
    Non blocking I/O, not ready.
    """


class StreamReadOnly(StreamError):
    """
    Tried to write a read-only buffer.
    """


class StreamWriteOnly(StreamError):
    """
    Tried to read a write-only buffer.
    """


class CallbackStore(ABC):
    """
    Callback Stores manage which error callback is currently active.
    """

    @abstractmethod
    def set_callback(self, callback: ErrorCallback | None) -> None:
        """
        Set the current callback in the store.
        """

    @abstractmethod
    def get_callback(self) -> ErrorCallback | None:
        """
        Retrieve the current callback from the store (if any)
        """


class GlobalStore(CallbackStore):
    """
    This is the simplest store: It just stores the callback in a variable.
    """

    _current: ErrorCallback | None
    __slots__ = ("_current",)

    def set_callback(self, callback: ErrorCallback | None) -> None:
        self._current = callback

    def get_callback(self) -> ErrorCallback | None:
        return getattr(self, "_current", None)


class ThreadLocalStore(CallbackStore):
    """
    Stores the callback in a thread-local variable.

    This is the store that matches the scoping of SDL's error string.
    """

    _current: threading.local

    def __init__(self) -> None:
        self._current = threading.local()

    def set_callback(self, callback: ErrorCallback | None) -> None:
        self._current.callback = callback

    def get_callback(self) -> ErrorCallback | None:
        return getattr(self._current, "callback", None)


class ContextVarStore(CallbackStore):
    """
    If you are using AsyncIO or similar frameworks, use this store.
    """

    _current: ContextVar[ErrorCallback | None]

    def __init__(self, name: str = "sdlengine.errors") -> None:
        self._current = ContextVar(name)

    def set_callback(self, callback: ErrorCallback | None) -> None:
        self._current.set(callback)

    def get_callback(self) -> ErrorCallback | None:
        return self._current.get(None)


_store: CallbackStore = ThreadLocalStore()


def get_store() -> CallbackStore:
    """
    :return: The store holding the error callback.
    """
    return _store


def set_store(store: CallbackStore) -> None:
    """
    Replaces the store holding the error callback.

    Callbacks registered in the previous store are not carried over.
    """
    global _store
    _store = store


def set_callback(callback: ErrorCallback | None) -> None:
    """
    Sets the callback that is invoked whenever a checked call fails.

    :param callback: Called with the current error message, or None to remove the callback.
    """
    _store.set_callback(callback)


def get_callback() -> ErrorCallback | None:
    return _store.get_callback()


@contextmanager
def use_callback(callback: ErrorCallback | None) -> Iterator[None]:
    """
    Uses the given error callback within a block.
    """
    previous = _store.get_callback()
    _store.set_callback(callback)
    try:
        yield
    finally:
        _store.set_callback(previous)


def get_error() -> str | None:
    """
    Retrieve a message about the last error that occurred on the current thread.

    SDL will not clear the error string for successful API calls.
    Only the last error is returned.

    :return: The message or None if there hasn't been an error since the last call to clear_error().
    """
    message = _SDL_GetError()
    if not message:
        return None
    return message.decode("utf-8", errors="replace")


def clear_error() -> None:
    """
    Clear any previous error message for this thread.
    """
    _SDL_ClearError()


def set_error(message: str) -> NoReturn:
    """
    Set the SDL error message for the current thread and raise it.

    Calling this function will replace any previous error message that was set.
    """
    _SDL_SetError(b"%s", message.encode("utf-8"))
    raise SdlError(message)


def invalid_param_error(param: str) -> NoReturn:
    """
    Signal that the given parameter is invalid.
    """
    _SDL_SetError(b"Parameter '%s' is invalid", param.encode("utf-8"))
    raise SdlError(get_error())


def out_of_memory() -> NoReturn:
    """
    Signal that memory allocation failed.
    """
    _SDL_OutOfMemory()
    raise SdlError(get_error())


def unsupported() -> NoReturn:
    """
    Signal that an unsupported operation was attempted.
    """
    _SDL_SetError(b"That operation is not supported")
    raise SdlError(get_error())


def call_error_callback() -> str | None:
    """
    Invokes the error callback (if any) with the current error message.

    :return: The current error message.
    """
    message = get_error()
    callback = _store.get_callback()
    if callback is not None:
        callback(message)
    return message


def check[T](result: T, sentinel: Any) -> T:
    """
    Checks the result of a native call.

    :param result: The value returned by the native call.
    :param sentinel: The value the native call returns on failure.
    :return: The unchanged result, if it does not match the sentinel.
    :raises SdlError: If the result matches the sentinel.
    """
    if result != sentinel:
        return result

    raise SdlError(call_error_callback())


def check_bool(result: bool) -> None:
    """
    Checks a native call that returns false on failure.
    """
    check(bool(result), False)


def check_id(result: int) -> int:
    """
    Checks a native call that returns an id, with zero signaling failure.
    """
    return check(result, 0)


def check_null[T](result: T) -> T:
    """
    Checks a native call that returns NULL on failure.

    Works for ctypes pointers, c_void_p results (None or 0) and c_char_p results,
    where an empty string is a valid result.
    """
    if result or isinstance(result, bytes):
        return result

    raise SdlError(call_error_callback())
