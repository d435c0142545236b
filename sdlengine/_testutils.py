# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Helpers for test-cases that need the native library.

Tests that call into SDL are marked with requires_library, so they are
skipped on machines without SDL3:

    >>> @requires_library
    ... def test_something() -> None: ...

use_dummy_drivers() selects SDL's headless drivers, so video, audio and
camera subsystems can be initialized in CI without a display or sound card.
It must run before the subsystems are initialized.
"""

import os
from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from sdlengine._dll import is_available

__all__ = ["DUMMY_DRIVERS", "requires_library", "use_dummy_drivers"]


DUMMY_DRIVERS = {
    "SDL_VIDEO_DRIVER": "dummy",
    "SDL_AUDIO_DRIVER": "dummy",
    "SDL_CAMERA_DRIVER": "dummy",
    "SDL_RENDER_DRIVER": "software",
}


requires_library = pytest.mark.skipif(not is_available(), reason="SDL3 could not be loaded")


@contextmanager
def use_dummy_drivers() -> Iterator[None]:
    """
    Selects the headless drivers within the block.
    """
    previous = {name: os.environ.get(name) for name in DUMMY_DRIVERS}
    os.environ.update(DUMMY_DRIVERS)
    try:
        yield
    finally:
        for name, value in previous.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value
