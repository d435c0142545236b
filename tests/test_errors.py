# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for error checking and the error callback stores."""

import logging
import threading
from collections.abc import Iterator

import pytest

from sdlengine import errors
from sdlengine._testutils import requires_library


@pytest.fixture(autouse=True)
def reset_store() -> Iterator[None]:
    previous = errors.get_store()
    errors.set_store(errors.ThreadLocalStore())
    yield
    errors.set_store(previous)


class TestStores:
    def test_global_store_starts_empty(self) -> None:
        assert errors.GlobalStore().get_callback() is None

    def test_global_store_is_shared_between_threads(self) -> None:
        store = errors.GlobalStore()
        store.set_callback(print)

        seen = []
        thread = threading.Thread(target=lambda: seen.append(store.get_callback()))
        thread.start()
        thread.join()

        assert seen == [print]

    def test_thread_local_store_is_not_shared(self) -> None:
        store = errors.ThreadLocalStore()
        store.set_callback(print)

        seen = []
        thread = threading.Thread(target=lambda: seen.append(store.get_callback()))
        thread.start()
        thread.join()

        assert seen == [None]
        assert store.get_callback() is print

    def test_context_var_store(self) -> None:
        store = errors.ContextVarStore("test_context_var_store")
        assert store.get_callback() is None
        store.set_callback(print)
        assert store.get_callback() is print

    def test_set_store_replaces_store(self) -> None:
        store = errors.GlobalStore()
        errors.set_store(store)
        assert errors.get_store() is store


class TestCallback:
    def test_set_and_get(self) -> None:
        errors.set_callback(print)
        assert errors.get_callback() is print
        errors.set_callback(None)
        assert errors.get_callback() is None

    def test_use_callback_restores_previous(self) -> None:
        errors.set_callback(print)
        with errors.use_callback(repr):
            assert errors.get_callback() is repr
        assert errors.get_callback() is print

    def test_use_callback_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), errors.use_callback(repr):
            raise RuntimeError
        assert errors.get_callback() is None


class TestChecks:
    def test_check_passes_result(self) -> None:
        assert errors.check(5, -1) == 5

    def test_check_id_passes_result(self) -> None:
        assert errors.check_id(12) == 12

    def test_check_null_accepts_empty_string(self) -> None:
        assert errors.check_null(b"") == b""

    def test_check_null_passes_pointer_values(self) -> None:
        assert errors.check_null(0x1000) == 0x1000

    def test_successful_checks_skip_callback(self) -> None:
        seen: list[str | None] = []
        with errors.use_callback(seen.append):
            assert errors.check(5, -1) == 5
            errors.check_bool(True)
            errors.check_id(3)
            errors.check_null(0x1000)
        assert seen == []

    def test_sdl_error_keeps_message(self) -> None:
        error = errors.SdlError("broken")
        assert error.message == "broken"
        assert str(error) == "broken"

    def test_sdl_error_without_message(self) -> None:
        error = errors.SdlError()
        assert error.message is None
        assert str(error) == "SDL call failed"

    def test_stream_errors_are_sdl_errors(self) -> None:
        for kind in (errors.StreamIOError, errors.StreamNotReady, errors.StreamReadOnly, errors.StreamWriteOnly):
            assert issubclass(kind, errors.StreamError)
            assert issubclass(kind, errors.SdlError)


@requires_library
class TestNativeErrors:
    @pytest.fixture(autouse=True)
    def clear(self) -> Iterator[None]:
        errors.clear_error()
        yield
        errors.clear_error()

    def test_set_error_raises_and_stores(self) -> None:
        with pytest.raises(errors.SdlError, match="Hello"):
            errors.set_error("Hello")
        assert errors.get_error() == "Hello"

    def test_failed_check_raises_without_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sdlengine"), pytest.raises(errors.SdlError):
            errors.check(-1, -1)
        assert not caplog.records

    def test_clear_error(self) -> None:
        with pytest.raises(errors.SdlError):
            errors.set_error("Hello")
        errors.clear_error()
        assert errors.get_error() is None

    def test_invalid_param_error(self) -> None:
        with pytest.raises(errors.SdlError) as info:
            errors.invalid_param_error("width")
        assert info.value.message == "Parameter 'width' is invalid"

    def test_unsupported(self) -> None:
        with pytest.raises(errors.SdlError) as info:
            errors.unsupported()
        assert info.value.message == "That operation is not supported"

    def test_failed_check_calls_callback(self) -> None:
        seen: list[str | None] = []
        with pytest.raises(errors.SdlError):
            errors.set_error("first")
        with errors.use_callback(seen.append), pytest.raises(errors.SdlError):
            errors.check_bool(False)
        assert seen == ["first"]

    def test_callback_is_scoped_to_thread(self) -> None:
        seen: list[str | None] = []
        errors.set_callback(seen.append)

        def _fail() -> None:
            with pytest.raises(errors.SdlError):
                errors.check(-1, -1)

        thread = threading.Thread(target=_fail)
        thread.start()
        thread.join()

        assert seen == []
