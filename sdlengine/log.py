# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.log exposes SDL's log system.

SDL writes its own diagnostics to stderr by default. To route them into
Python's logging-module instead, call forward_to_logging():

    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> forward_to_logging()

Messages end up in the logger "sdlengine.sdl.<category>", e.g.
"sdlengine.sdl.video".
"""

import ctypes
import logging
from collections.abc import Callable
from enum import IntEnum
from logging import getLogger
from typing import Any

from . import errors
from ._dll import bind

__all__ = [
    "Category",
    "LogOutputFunction",
    "Priority",
    "critical",
    "debug",
    "error",
    "forward_to_logging",
    "get_default_output_function",
    "get_priority",
    "info",
    "log",
    "log_message",
    "reset_all_priorities",
    "set_all_priorities",
    "set_output_function",
    "set_priority",
    "set_priority_prefix",
    "trace",
    "verbose",
    "warn",
]


logger = getLogger(__name__)

type OutputFunction = Callable[[int, Priority, str], None]


class Priority(IntEnum):
    INVALID = 0
    TRACE = 1
    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    CRITICAL = 7


class Category(IntEnum):
    """
    The predefined log categories.

    Applications may use any value starting at CUSTOM for their own categories.
    """

    APPLICATION = 0
    ERROR = 1
    ASSERT = 2
    SYSTEM = 3
    AUDIO = 4
    VIDEO = 5
    RENDER = 6
    INPUT = 7
    TEST = 8
    GPU = 9
    CUSTOM = 19


_LEVELS = {
    Priority.TRACE: logging.DEBUG,
    Priority.VERBOSE: logging.DEBUG,
    Priority.DEBUG: logging.DEBUG,
    Priority.INFO: logging.INFO,
    Priority.WARN: logging.WARNING,
    Priority.ERROR: logging.ERROR,
    Priority.CRITICAL: logging.CRITICAL,
}


LogOutputFunction = ctypes.CFUNCTYPE(None, ctypes.c_void_p, ctypes.c_int, ctypes.c_int, ctypes.c_char_p)

# Variadic: the argument types are left unchecked.
_SDL_LogMessage = bind("SDL_LogMessage", None, None)
_SDL_SetLogPriority = bind("SDL_SetLogPriority", [ctypes.c_int, ctypes.c_int], None)
_SDL_GetLogPriority = bind("SDL_GetLogPriority", [ctypes.c_int], ctypes.c_int)
_SDL_SetLogPriorities = bind("SDL_SetLogPriorities", [ctypes.c_int], None)
_SDL_ResetLogPriorities = bind("SDL_ResetLogPriorities", [], None)
_SDL_SetLogPriorityPrefix = bind("SDL_SetLogPriorityPrefix", [ctypes.c_int, ctypes.c_char_p], ctypes.c_bool)
_SDL_GetDefaultLogOutputFunction = bind("SDL_GetDefaultLogOutputFunction", [], LogOutputFunction)
_SDL_SetLogOutputFunction = bind("SDL_SetLogOutputFunction", [LogOutputFunction, ctypes.c_void_p], None)


def level_for(priority: int) -> int:
    """
    :return: The logging level matching an SDL log priority.
    """
    try:
        return _LEVELS[Priority(priority)]
    except (KeyError, ValueError):
        return logging.NOTSET


def category_name(category: int) -> str:
    try:
        return Category(category).name.lower()
    except ValueError:
        return f"custom{category - Category.CUSTOM}" if category >= Category.CUSTOM else f"reserved{category}"


def log_message(category: int, priority: Priority, message: str) -> None:
    """
    Log a message with the specified category and priority.
    """
    _SDL_LogMessage(ctypes.c_int(category), ctypes.c_int(priority), b"%s", message.encode("utf-8"))


def log(message: str) -> None:
    """
    Log a message with Category.APPLICATION and Priority.INFO.
    """
    log_message(Category.APPLICATION, Priority.INFO, message)


def trace(category: int, message: str) -> None:
    log_message(category, Priority.TRACE, message)


def verbose(category: int, message: str) -> None:
    log_message(category, Priority.VERBOSE, message)


def debug(category: int, message: str) -> None:
    log_message(category, Priority.DEBUG, message)


def info(category: int, message: str) -> None:
    log_message(category, Priority.INFO, message)


def warn(category: int, message: str) -> None:
    log_message(category, Priority.WARN, message)


def error(category: int, message: str) -> None:
    log_message(category, Priority.ERROR, message)


def critical(category: int, message: str) -> None:
    log_message(category, Priority.CRITICAL, message)


def set_priority(category: int, priority: Priority) -> None:
    _SDL_SetLogPriority(category, priority)


def get_priority(category: int) -> Priority:
    return Priority(_SDL_GetLogPriority(category))


def set_all_priorities(priority: Priority) -> None:
    """
    Set the priority of all log categories.
    """
    _SDL_SetLogPriorities(priority)


def reset_all_priorities() -> None:
    """
    Reset all priorities to default.
    """
    _SDL_ResetLogPriorities()


def set_priority_prefix(priority: Priority, prefix: str | None) -> None:
    """
    Set the text prepended to log messages of a given priority.

    :param prefix: The prefix to use or None to use the default.
    """
    errors.check_bool(_SDL_SetLogPriorityPrefix(priority, None if prefix is None else prefix.encode("utf-8")))


def get_default_output_function() -> Any:
    """
    :return: SDL's default output function as a native function pointer.
    """
    return _SDL_GetDefaultLogOutputFunction()


_output: OutputFunction | None = None


@LogOutputFunction
def _dispatch(_userdata: int | None, category: int, priority: int, message: bytes | None) -> None:
    output = _output
    if output is None:
        return

    try:
        output(category, Priority(priority), (message or b"").decode("utf-8", errors="replace"))
    except Exception:
        logger.exception("Log output function failed.")


def set_output_function(output: OutputFunction | None) -> None:
    """
    Replace the default log output function.

    :param output: Called with the category, the priority and the message.
                   None restores SDL's default output function.
    """
    global _output
    _output = output
    if output is None:
        _SDL_SetLogOutputFunction(get_default_output_function(), None)
    else:
        _SDL_SetLogOutputFunction(_dispatch, None)


def _to_logging(category: int, priority: Priority, message: str) -> None:
    getLogger(f"sdlengine.sdl.{category_name(category)}").log(level_for(priority), message)


def forward_to_logging() -> None:
    """
    Route every SDL log message into Python's logging-module.
    """
    set_output_function(_to_logging)
