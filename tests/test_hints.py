# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for configuration hints."""

from collections.abc import Iterator

import pytest

from sdlengine import hints
from sdlengine._testutils import requires_library

pytestmark = requires_library

NAME = "SDLENGINE_TEST_HINT"


@pytest.fixture(autouse=True)
def reset() -> Iterator[None]:
    yield
    hints.reset_hint(NAME)


def test_set_and_get() -> None:
    assert hints.get_hint(NAME) is None
    hints.set_hint(NAME, "1")
    assert hints.get_hint(NAME) == "1"
    assert hints.get_boolean(NAME)


def test_boolean_default() -> None:
    assert hints.get_boolean(NAME, default=True)
    assert not hints.get_boolean(NAME, default=False)


def test_priority() -> None:
    hints.set_hint_with_priority(NAME, "override", hints.Priority.OVERRIDE)
    hints.set_hint(NAME, "normal")
    assert hints.get_hint(NAME) == "override"


def test_reset() -> None:
    hints.set_hint(NAME, "value")
    hints.reset_hint(NAME)
    assert hints.get_hint(NAME) is None


def test_callback() -> None:
    seen: list[tuple[str, str | None, str | None]] = []
    handle = hints.add_callback(NAME, lambda *args: seen.append(args))
    try:
        hints.set_hint(NAME, "a")
        hints.set_hint(NAME, "b")
    finally:
        hints.remove_callback(NAME, handle)
    hints.set_hint(NAME, "c")

    assert seen == [(NAME, None, None), (NAME, None, "a"), (NAME, "a", "b")]
