# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the version module."""

from sdlengine import version
from sdlengine._testutils import requires_library
from sdlengine.version import Version


def test_make() -> None:
    assert version.make(3, 2, 10) == 3002010


def test_from_number() -> None:
    assert Version.from_number(3002010) == Version(3, 2, 10)
    assert Version(3, 2, 10).number == 3002010


def test_at_least() -> None:
    v = Version(3, 2, 10)
    assert v.at_least(3)
    assert v.at_least(3, 2, 10)
    assert not v.at_least(3, 3)
    assert not v.at_least(4)


def test_str() -> None:
    assert str(Version(3, 2, 0)) == "3.2.0"


@requires_library
def test_linked_version_is_supported() -> None:
    assert version.get() >= version.MINIMUM
    assert isinstance(version.get_revision(), str)
