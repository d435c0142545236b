# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the filesystem module."""

import logging
import os
from pathlib import Path

import pytest

from sdlengine import filesystem
from sdlengine._testutils import requires_library
from sdlengine.errors import SdlError
from sdlengine.filesystem import EnumerationResult, GlobFlags, NativePathInfo, PathInfo, PathType


def test_path_info_from_sdl() -> None:
    native = NativePathInfo(PathType.FILE, 12, 1, 2, 3)
    info = PathInfo.from_sdl(native)
    assert info.type is PathType.FILE
    assert info.size == 12
    assert (info.create_time, info.modify_time, info.access_time) == (1, 2, 3)


@requires_library
class TestNativeFilesystem:
    @pytest.fixture
    def tree(self, tmp_path: Path) -> Path:
        (tmp_path / "a.txt").write_bytes(b"hello")
        (tmp_path / "B.TXT").write_bytes(b"")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.txt").write_bytes(b"")
        return tmp_path

    def test_base_path(self) -> None:
        base = filesystem.get_base_path()
        assert base.endswith(os.sep)
        assert Path(base).is_dir()

    def test_current_directory(self) -> None:
        assert Path(filesystem.get_current_directory()) == Path.cwd()

    def test_create_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "x"
        filesystem.create_directory(target)
        filesystem.create_directory(target)
        assert target.is_dir()
        assert filesystem.get_path_info(target).type is PathType.DIRECTORY

    def test_path_info(self, tree: Path) -> None:
        info = filesystem.get_path_info(tree / "a.txt")
        assert info.type is PathType.FILE
        assert info.size == 5
        assert info.modify_time > 0

    def test_missing_path(self, tmp_path: Path) -> None:
        assert not filesystem.path_exists(tmp_path / "missing")
        with pytest.raises(SdlError):
            filesystem.get_path_info(tmp_path / "missing")

    def test_copy_rename_remove(self, tree: Path) -> None:
        filesystem.copy_file(tree / "a.txt", tree / "copy.txt")
        assert (tree / "copy.txt").read_bytes() == b"hello"

        filesystem.rename_path(tree / "copy.txt", tree / "moved.txt")
        assert not filesystem.path_exists(tree / "copy.txt")
        assert filesystem.path_exists(tree / "moved.txt")

        filesystem.remove_path(tree / "moved.txt")
        assert not (tree / "moved.txt").exists()
        filesystem.remove_path(tree / "moved.txt")

    def test_list_directory(self, tree: Path) -> None:
        assert filesystem.list_directory(tree) == ["B.TXT", "a.txt", "sub"]

    def test_enumeration_stops_on_success(self, tree: Path) -> None:
        seen: list[tuple[str, str]] = []

        def first(dirname: str, name: str) -> EnumerationResult:
            seen.append((dirname, name))
            return EnumerationResult.SUCCESS

        filesystem.enumerate_directory(tree, first)
        assert len(seen) == 1
        assert Path(seen[0][0]) == tree

    def test_enumeration_callback_failure(self, tree: Path, caplog: pytest.LogCaptureFixture) -> None:
        def broken(dirname: str, name: str) -> EnumerationResult:
            raise RuntimeError("broken")

        with caplog.at_level(logging.ERROR, logger="sdlengine.filesystem"), pytest.raises(SdlError):
            filesystem.enumerate_directory(tree, broken)
        assert "enumeration callback failed" in caplog.text

    def test_glob(self, tree: Path) -> None:
        assert filesystem.glob_directory(tree, "a*") == ["a.txt"]
        assert filesystem.glob_directory(tree, "b*", GlobFlags.CASE_INSENSITIVE) == ["B.TXT"]
        assert sorted(filesystem.glob_directory(tree)) == ["B.TXT", "a.txt", "sub", "sub/c.txt"]

    def test_glob_without_matches(self, tree: Path) -> None:
        assert filesystem.glob_directory(tree, "*.png") == []
