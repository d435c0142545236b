# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for locating and binding the native library."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from sdlengine import _dll


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(_dll.ENV_LIBRARY, raising=False)
    monkeypatch.delenv(_dll.ENV_LIBRARY_PATH, raising=False)
    yield


class TestCandidates:
    def test_explicit_library_is_the_only_candidate(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(_dll.ENV_LIBRARY, "/opt/sdl/libSDL3.so")
        assert _dll._candidates() == ["/opt/sdl/libSDL3.so"]

    def test_search_path_is_tried_first(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        pattern, _ = _dll._platform_names()
        library = tmp_path / pattern.format("SDL3")
        library.touch()

        monkeypatch.setenv(_dll.ENV_LIBRARY_PATH, os.fspath(tmp_path))
        assert _dll._candidates()[0] == os.fspath(library)

    def test_missing_files_are_skipped(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv(_dll.ENV_LIBRARY_PATH, os.fspath(tmp_path))
        assert not any(c.startswith(os.fspath(tmp_path)) for c in _dll._candidates())

    def test_plain_names_are_included(self) -> None:
        _, plain = _dll._platform_names()
        assert set(plain) <= set(_dll._candidates())


class TestBind:
    def test_bind_is_lazy(self) -> None:
        func = _dll.bind("SDL_ThisFunctionDoesNotExist", [], None)
        assert repr(func) == "<Function SDL_ThisFunctionDoesNotExist>"

    def test_library_not_found_is_an_os_error(self) -> None:
        assert issubclass(_dll.LibraryNotFoundError, OSError)
