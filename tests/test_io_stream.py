# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the io_stream module."""

import ctypes
import errno
import gc
import io
import weakref
from typing import Any

import pytest

from sdlengine import io_stream
from sdlengine._testutils import requires_library
from sdlengine.io_stream import (
    CloseFunc,
    FlushFunc,
    ReadFunc,
    SeekFunc,
    SizeFunc,
    Status,
    Stream,
    StreamAdapter,
    StreamInterface,
    Whence,
    WriteFunc,
)


def make_status() -> ctypes.Array[ctypes.c_int]:
    return (ctypes.c_int * 1)(Status.READY)


def read_into(adapter: StreamAdapter, size: int, status: ctypes.Array[ctypes.c_int]) -> bytes:
    buffer = ctypes.create_string_buffer(size)
    count = adapter.read(ctypes.addressof(buffer), size, status)
    return buffer.raw[:count]


class Blocking(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readinto(self, buffer: object) -> int:
        raise BlockingIOError(errno.EAGAIN, "no data yet")

    def write(self, data: object) -> int:
        raise BlockingIOError(errno.EAGAIN, "buffer full", 2)


class Starved(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def readinto(self, buffer: object) -> None:
        return None


class Owner:
    pass


def make_interface(data: bytes, closed: list[bool]) -> StreamInterface:
    source = io.BytesIO(data)

    def size(userdata: int | None) -> int:
        return len(data)

    def seek(userdata: int | None, offset: int, whence: int) -> int:
        return source.seek(offset, whence)

    def read(userdata: int | None, ptr: int, size: int, status: Any) -> int:
        chunk = source.read(size)
        if not chunk:
            status[0] = Status.EOF
            return 0
        ctypes.memmove(ptr, chunk, len(chunk))
        return len(chunk)

    def write(userdata: int | None, ptr: int, size: int, status: Any) -> int:
        status[0] = Status.READONLY
        return 0

    def flush(userdata: int | None, status: Any) -> bool:
        return True

    def close(userdata: int | None) -> bool:
        closed.append(True)
        return True

    return StreamInterface.new(
        SizeFunc(size), SeekFunc(seek), ReadFunc(read), WriteFunc(write), FlushFunc(flush), CloseFunc(close)
    )


class TestStreamAdapter:
    def test_size(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        assert adapter.size() == 10

    def test_size_keeps_position(self) -> None:
        source = io.BytesIO(b"0123456789")
        source.seek(4)
        StreamAdapter(source).size()
        assert source.tell() == 4

    def test_seek_set(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        assert adapter.seek(3, Whence.SET) == 3

    def test_seek_cur(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        adapter.seek(3, Whence.SET)
        assert adapter.seek(2, Whence.CUR) == 5
        assert adapter.seek(-4, Whence.CUR) == 1

    def test_seek_end_counts_back_from_the_end(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        assert adapter.seek(0, Whence.END) == 10
        assert adapter.seek(3, Whence.END) == 7

    def test_seek_out_of_range(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        assert adapter.seek(-1, Whence.SET) == -1
        assert adapter.seek(11, Whence.END) == -1
        assert adapter.seek(-1, Whence.END) == -1
        assert adapter.seek(0, 7) == -1

    def test_read(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        status = make_status()
        assert read_into(adapter, 4, status) == b"0123"
        assert read_into(adapter, 4, status) == b"4567"
        assert read_into(adapter, 4, status) == b"89"
        assert status[0] == Status.READY

    def test_read_sets_eof(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b""))
        status = make_status()
        assert read_into(adapter, 4, status) == b""
        assert status[0] == Status.EOF

    def test_read_zero_bytes(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"abc"))
        status = make_status()
        assert adapter.read(None, 0, status) == 0
        assert status[0] == Status.READY

    def test_read_null_pointer_is_an_error(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"abc"))
        status = make_status()
        assert adapter.read(None, 3, status) == 0
        assert status[0] == Status.ERROR

    def test_write(self) -> None:
        source = io.BytesIO()
        adapter = StreamAdapter(source)
        data = ctypes.create_string_buffer(b"hello", 5)
        status = make_status()

        assert adapter.write(ctypes.addressof(data), 5, status) == 5
        assert source.getvalue() == b"hello"
        assert status[0] == Status.READY

    def test_write_to_readonly_stream(self) -> None:
        adapter = StreamAdapter(io.BufferedReader(io.BytesIO(b"abc")))
        data = ctypes.create_string_buffer(b"x", 1)
        status = make_status()

        assert adapter.write(ctypes.addressof(data), 1, status) == 0
        assert status[0] == Status.READONLY

    def test_flush(self) -> None:
        adapter = StreamAdapter(io.BytesIO())
        assert adapter.flush(make_status())

    def test_flush_closed_stream(self) -> None:
        source = io.BytesIO()
        source.close()
        status = make_status()
        assert not StreamAdapter(source).flush(status)
        assert status[0] == Status.ERROR

    def test_register_and_close(self) -> None:
        source = io.BytesIO()
        adapter = StreamAdapter(source)
        handle = adapter.register()

        assert handle >= 1
        assert adapter.register() == handle
        assert adapter.close()
        assert adapter.handle is None
        assert not source.closed

    def test_seek_past_the_end(self) -> None:
        adapter = StreamAdapter(io.BytesIO(b"0123456789"))
        assert adapter.seek(20, Whence.SET) == 20
        assert adapter.seek(5, Whence.CUR) == 25

    def test_write_zero_bytes(self) -> None:
        adapter = StreamAdapter(io.BytesIO())
        status = make_status()
        assert adapter.write(None, 0, status) == 0
        assert status[0] == Status.READY

    def test_read_from_writeonly_stream(self) -> None:
        adapter = StreamAdapter(io.BufferedWriter(io.BytesIO()))
        status = make_status()
        assert read_into(adapter, 4, status) == b""
        assert status[0] == Status.WRITEONLY

    def test_read_would_block(self) -> None:
        adapter = StreamAdapter(Blocking())
        status = make_status()
        assert read_into(adapter, 4, status) == b""
        assert status[0] == Status.NOT_READY

    def test_read_without_data_available(self) -> None:
        adapter = StreamAdapter(Starved())
        status = make_status()
        assert read_into(adapter, 4, status) == b""
        assert status[0] == Status.NOT_READY

    def test_partial_write_would_block(self) -> None:
        adapter = StreamAdapter(Blocking())
        data = ctypes.create_string_buffer(b"hello", 5)
        status = make_status()
        assert adapter.write(ctypes.addressof(data), 5, status) == 2
        assert status[0] == Status.NOT_READY

    def test_close_releases_handle_when_flush_fails(self) -> None:
        source = io.BytesIO()
        adapter = StreamAdapter(source)
        handle = adapter.register()
        source.close()

        assert not adapter.close()
        assert adapter.handle is None
        assert handle not in io_stream._adapters

    def test_registry_tracks_adapter(self) -> None:
        adapter = StreamAdapter(io.BytesIO())
        handle = adapter.register()
        assert handle in io_stream._adapters
        assert io_stream._lookup(handle) is adapter

        adapter.close()
        assert handle not in io_stream._adapters
        assert io_stream._lookup(handle) is None


class TestHandOver:
    def test_keeps_owner_alive_during_call(self) -> None:
        owner = Owner()
        ref = weakref.ref(owner)
        stream = Stream(ctypes.pointer(io_stream._IOStream()), keepalive=owner)
        del owner

        with stream._handed_over(True) as pointer:
            assert pointer
            assert stream.closed
            gc.collect()
            assert ref() is not None

        gc.collect()
        assert ref() is None

    def test_keeps_owner_alive_when_call_fails(self) -> None:
        owner = Owner()
        ref = weakref.ref(owner)
        stream = Stream(ctypes.pointer(io_stream._IOStream()), keepalive=owner)
        del owner

        with pytest.raises(RuntimeError), stream._handed_over(True):
            gc.collect()
            assert ref() is not None
            raise RuntimeError

        gc.collect()
        assert ref() is None
        assert stream.closed

    def test_stream_stays_open_without_close_io(self) -> None:
        owner = Owner()
        stream = Stream(ctypes.pointer(io_stream._IOStream()), keepalive=owner)

        with stream._handed_over(False) as pointer:
            assert pointer is stream.pointer

        assert not stream.closed
        assert stream._keepalive is owner
        stream.pointer = io_stream._IOStreamP()


@requires_library
class TestHostStream:
    @pytest.fixture
    def source(self) -> io.BytesIO:
        data = bytearray(64)
        data[1] = 42
        return io.BytesIO(data)

    def test_scenario(self, source: io.BytesIO) -> None:
        with Stream.from_host(source) as stream:
            stream.write_u8(7)
            assert source.getvalue()[0] == 7

            assert stream.read_u8() == 42
            assert stream.get_size() == 64

            assert stream.seek(50, Whence.SET) == 50
            assert stream.seek(23, Whence.END) == 41
            assert stream.seek(2, Whence.CUR) == 43
            assert stream.tell() == 43

    def test_read_and_write(self, source: io.BytesIO) -> None:
        with Stream.from_host(source) as stream:
            stream.seek(10)
            stream.write(b"abc")
            stream.seek(10)
            assert stream.read(3) == b"abc"

    def test_closing_keeps_host_stream_open(self, source: io.BytesIO) -> None:
        stream = Stream.from_host(source)
        stream.close()
        assert stream.closed
        assert not source.closed

    def test_read_at_end(self, source: io.BytesIO) -> None:
        with Stream.from_host(source) as stream:
            stream.seek(0, Whence.END)
            assert stream.read_u8() is None


@requires_library
class TestMemoryStream:
    def test_const_mem(self) -> None:
        with Stream.from_const_mem(b"\x01\x02\x03\x04") as stream:
            assert stream.get_size() == 4
            assert stream.read_u16_le() == 0x0201
            assert stream.read_u16_be() == 0x0304

    def test_mem_writes_through(self) -> None:
        buffer = bytearray(4)
        with Stream.from_mem(buffer) as stream:
            stream.write_u32_be(0x01020304)
        assert buffer == b"\x01\x02\x03\x04"

    def test_dynamic_mem(self) -> None:
        with Stream.from_dynamic_mem() as stream:
            stream.write(b"hello world")
            stream.seek(0)
            assert stream.read(5) == b"hello"

    def test_load(self) -> None:
        stream = Stream.from_const_mem(b"payload")
        assert stream.load(close_io=True) == b"payload"
        assert stream.closed

    def test_as_file(self) -> None:
        with Stream.from_dynamic_mem() as stream:
            file = io.BufferedRandom(stream.as_file())
            file.write(b"buffered")
            file.flush()
            file.seek(0)
            assert file.read() == b"buffered"

    def test_load_larger_buffer(self) -> None:
        payload = bytes(range(256)) * 64
        stream = Stream.from_const_mem(bytes(payload))
        gc.collect()
        assert stream.load(close_io=True) == payload


@requires_library
class TestInterfaceStream:
    def test_read(self) -> None:
        closed: list[bool] = []
        with Stream.open(make_interface(b"abc", closed)) as stream:
            assert stream.get_size() == 3
            assert stream.read(3) == b"abc"
        assert closed == [True]

    def test_close_calls_back_after_interface_is_dropped(self) -> None:
        closed: list[bool] = []
        stream = Stream.open(make_interface(b"abc", closed))
        gc.collect()

        stream.close()
        assert closed == [True]
        assert stream.closed

    def test_load_closes_through_dropped_interface(self) -> None:
        closed: list[bool] = []
        stream = Stream.open(make_interface(b"payload", closed))
        gc.collect()

        assert stream.load(close_io=True) == b"payload"
        assert closed == [True]
        assert stream.closed
