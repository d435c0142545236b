# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the log module."""

import logging
from collections.abc import Iterator

import pytest

from sdlengine import log
from sdlengine._testutils import requires_library
from sdlengine.log import Category, Priority


class TestMapping:
    def test_level_for(self) -> None:
        assert log.level_for(Priority.TRACE) == logging.DEBUG
        assert log.level_for(Priority.INFO) == logging.INFO
        assert log.level_for(Priority.WARN) == logging.WARNING
        assert log.level_for(Priority.CRITICAL) == logging.CRITICAL

    def test_level_for_invalid(self) -> None:
        assert log.level_for(Priority.INVALID) == logging.NOTSET
        assert log.level_for(100) == logging.NOTSET

    def test_category_name(self) -> None:
        assert log.category_name(Category.APPLICATION) == "application"
        assert log.category_name(Category.RENDER) == "render"
        assert log.category_name(Category.CUSTOM) == "custom0"
        assert log.category_name(Category.CUSTOM + 3) == "custom3"
        assert log.category_name(12) == "reserved12"


@requires_library
class TestOutput:
    @pytest.fixture(autouse=True)
    def restore(self) -> Iterator[None]:
        yield
        log.set_output_function(None)
        log.reset_all_priorities()

    def test_priorities(self) -> None:
        log.set_priority(Category.TEST, Priority.VERBOSE)
        assert log.get_priority(Category.TEST) == Priority.VERBOSE

        log.set_all_priorities(Priority.ERROR)
        assert log.get_priority(Category.AUDIO) == Priority.ERROR

    def test_custom_output(self) -> None:
        seen: list[tuple[int, Priority, str]] = []
        log.set_output_function(lambda *args: seen.append(args))
        log.set_priority(Category.TEST, Priority.INFO)

        log.info(Category.TEST, "hello %s")
        log.debug(Category.TEST, "filtered")

        assert seen == [(Category.TEST, Priority.INFO, "hello %s")]

    def test_failing_output_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def _fail(category: int, priority: Priority, message: str) -> None:
            raise RuntimeError(message)

        log.set_output_function(_fail)
        log.set_priority(Category.APPLICATION, Priority.INFO)

        with caplog.at_level(logging.ERROR, logger="sdlengine.log"):
            log.log("boom")

        assert "Log output function failed." in caplog.text

    def test_forward_to_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        log.forward_to_logging()
        log.set_priority(Category.VIDEO, Priority.WARN)

        with caplog.at_level(logging.DEBUG, logger="sdlengine.sdl"):
            log.warn(Category.VIDEO, "careful")

        record = caplog.records[-1]
        assert record.name == "sdlengine.sdl.video"
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "careful"
