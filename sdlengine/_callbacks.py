# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Keeps Python callbacks alive while native code holds on to them.

SDL receives an integer handle as userdata. The trampolines look the
Python callable up through this handle, so no Python object pointer ever
has to be handed to C.
"""

import itertools
import threading
from logging import getLogger

__all__ = ["Registry"]


logger = getLogger(__name__)


class Registry[T]:
    """
    A thread-safe table of objects keyed by integer handles.
    """

    __slots__ = ("_counter", "_entries", "_lock", "name")

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries = dict[int, T]()
        self._lock = threading.Lock()
        self._counter = itertools.count(1)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries

    def add(self, value: T) -> int:
        """
        :return: A non-zero handle identifying the value.
        """
        with self._lock:
            handle = next(self._counter)
            self._entries[handle] = value
        logger.debug(f"{self.name}: registered handle {handle}")
        return handle

    def get(self, handle: int | None) -> T | None:
        if not handle:
            return None
        return self._entries.get(handle)

    def pop(self, handle: int | None) -> T | None:
        if not handle:
            return None
        with self._lock:
            value = self._entries.pop(handle, None)
        if value is not None:
            logger.debug(f"{self.name}: released handle {handle}")
        return value
