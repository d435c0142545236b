# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.io_stream wraps SDL's I/O streams.

SDL offers streams over files and memory areas:

    >>> with Stream.from_mem(bytearray(64)) as stream:
    ...     stream.write_u8(7)
    ...     stream.seek(0, Whence.SET)
    ...     stream.read_u8()
    7

Any Python binary stream (a file opened with "rb+", io.BytesIO, ...) can be
turned into an SDL stream as well. SDL then drives the Python object through
a StreamAdapter:

    >>> source = io.BytesIO(bytes(64))
    >>> with Stream.from_host(source) as stream:
    ...     surface = Surface.load_bmp_io(stream)

The adapter never closes the Python object. Its lifetime remains the
responsibility of the caller.

Unlike SDL's own streams, streams bridged from Python objects interpret an
end-relative seek offset as the distance back from the end of the stream,
and fail for offsets outside the stream. Seeking before the start always
fails. Absolute and relative seeks may move past the end.
"""

from __future__ import annotations

import ctypes
import io
import warnings
from collections.abc import Buffer, Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import Enum, IntEnum
from logging import getLogger
from os import PathLike, fspath
from types import TracebackType
from typing import Any, Protocol, Self, runtime_checkable

from . import errors, properties, stdinc
from ._callbacks import Registry
from ._dll import bind

__all__ = [
    "INTERFACE",
    "FileMode",
    "SeekableStream",
    "Status",
    "Stream",
    "StreamAdapter",
    "StreamFile",
    "StreamInterface",
    "StreamProperties",
    "Whence",
    "load_file",
    "save_file",
]


logger = getLogger(__name__)


class Whence(IntEnum):
    """
    Possible whence values for seeking.
    """

    #: Seek from the beginning of data.
    SET = 0
    #: Seek relative to current read point.
    CUR = 1
    #: Seek relative to the end of data.
    END = 2


class Status(IntEnum):
    """
    Status, set by a read or write operation.
    """

    READY = 0
    ERROR = 1
    EOF = 2
    NOT_READY = 3
    READONLY = 4
    WRITEONLY = 5


class FileMode(Enum):
    """
    Mode for Stream.from_file().
    """

    READ_TEXT = "r"
    WRITE_TEXT = "w"
    APPEND_TEXT = "a"
    READ_WRITE_UPDATE_TEXT = "r+"
    READ_WRITE_REPLACE_TEXT = "w+"
    READ_APPEND_TEXT = "a+"
    READ_BINARY = "rb"
    WRITE_BINARY = "wb"
    APPEND_BINARY = "ab"
    READ_WRITE_UPDATE_BINARY = "r+b"
    READ_WRITE_REPLACE_BINARY = "w+b"
    READ_APPEND_BINARY = "a+b"


@runtime_checkable
class SeekableStream(Protocol):
    """
    The capabilities a Python object needs to back an SDL stream.

    Every binary stream of the io module implements it.
    """

    def read(self, size: int = -1, /) -> bytes | None: ...

    def write(self, data: Buffer, /) -> int | None: ...

    def seek(self, offset: int, whence: int = io.SEEK_SET, /) -> int: ...

    def tell(self) -> int: ...

    def flush(self) -> None: ...


_StatusPointer = ctypes.POINTER(ctypes.c_int)

SizeFunc = ctypes.CFUNCTYPE(ctypes.c_int64, ctypes.c_void_p)
SeekFunc = ctypes.CFUNCTYPE(ctypes.c_int64, ctypes.c_void_p, ctypes.c_int64, ctypes.c_int)
ReadFunc = ctypes.CFUNCTYPE(ctypes.c_size_t, ctypes.c_void_p, ctypes.c_void_p, ctypes.c_size_t, _StatusPointer)
WriteFunc = ctypes.CFUNCTYPE(ctypes.c_size_t, ctypes.c_void_p, ctypes.c_void_p, ctypes.c_size_t, _StatusPointer)
FlushFunc = ctypes.CFUNCTYPE(ctypes.c_bool, ctypes.c_void_p, _StatusPointer)
CloseFunc = ctypes.CFUNCTYPE(ctypes.c_bool, ctypes.c_void_p)


class StreamInterface(ctypes.Structure):
    """
    The function pointers that drive a Stream (SDL_IOStreamInterface).
    """

    _fields_ = [
        ("version", ctypes.c_uint32),
        ("size", SizeFunc),
        ("seek", SeekFunc),
        ("read", ReadFunc),
        ("write", WriteFunc),
        ("flush", FlushFunc),
        ("close", CloseFunc),
    ]

    @classmethod
    def new(
        cls,
        size: Any,
        seek: Any,
        read: Any,
        write: Any,
        flush: Any,
        close: Any,
    ) -> Self:
        """
        Builds an interface with the version field filled in.

        Each argument must be an instance of the matching *Func type.
        """
        return cls(ctypes.sizeof(cls), size, seek, read, write, flush, close)


class _IOStream(ctypes.Structure):
    pass


_IOStreamP = ctypes.POINTER(_IOStream)


def _set_status(status: Any, value: Status) -> None:
    if status:
        status[0] = value


class StreamAdapter:
    """
    Implements the six callbacks of a StreamInterface on top of a Python stream.

    No exception escapes any of the callbacks. Failures are reported with the
    sentinel values and status codes SDL expects instead.
    """

    __slots__ = ("handle", "source")

    def __init__(self, source: SeekableStream) -> None:
        self.source = source
        self.handle: int | None = None

    def __repr__(self) -> str:
        return f"<StreamAdapter handle={self.handle} source={self.source!r}>"

    def register(self) -> int:
        """
        Makes the adapter reachable from the native callbacks.

        :return: The handle to pass as the userdata of the stream.
        """
        if self.handle is None:
            self.handle = _adapters.add(self)
        return self.handle

    def unregister(self) -> None:
        _adapters.pop(self.handle)
        self.handle = None

    def _end(self) -> int:
        current = self.source.tell()
        try:
            self.source.seek(0, io.SEEK_END)
            return self.source.tell()
        finally:
            self.source.seek(current, io.SEEK_SET)

    def size(self) -> int:
        """
        :return: The total size of the data stream, or -1 on error.
        """
        try:
            return self._end()
        except Exception:
            logger.debug("Failed to determine the size of the stream.", exc_info=True)
            return -1

    def seek(self, offset: int, whence: int) -> int:
        """
        Seek to offset relative to whence.

        :return: The final offset in the data stream, or -1 on error.
        """
        try:
            match whence:
                case Whence.SET:
                    target = offset
                case Whence.CUR:
                    target = self.source.tell() + offset
                case Whence.END:
                    end = self._end()
                    if offset < 0 or offset > end:
                        return -1
                    target = end - offset
                case _:
                    return -1

            if target < 0:
                return -1

            self.source.seek(target, io.SEEK_SET)
            return self.source.tell()
        except Exception:
            logger.debug("Failed to seek the stream.", exc_info=True)
            return -1

    def read(self, ptr: int | None, size: int, status: Any) -> int:
        """
        Read up to size bytes from the stream into the memory at ptr.

        :return: The number of bytes read. Zero with the status set to EOF at the end of the data.
        """
        if size == 0:
            return 0

        try:
            if not ptr:
                raise ValueError("Read into a NULL pointer")

            target = (ctypes.c_ubyte * size).from_address(ptr)
            readinto = getattr(self.source, "readinto", None)
            if readinto is not None:
                count = readinto(target)
            else:
                data = self.source.read(size)
                count = None if data is None else len(data)
                if count:
                    ctypes.memmove(ptr, data, count)
        except BlockingIOError:
            _set_status(status, Status.NOT_READY)
            return 0
        except io.UnsupportedOperation:
            _set_status(status, Status.WRITEONLY)
            return 0
        except Exception:
            logger.debug("Failed to read from the stream.", exc_info=True)
            _set_status(status, Status.ERROR)
            return 0

        if count is None:
            _set_status(status, Status.NOT_READY)
            return 0
        if count == 0:
            _set_status(status, Status.EOF)
        return count

    def write(self, ptr: int | None, size: int, status: Any) -> int:
        """
        Write up to size bytes from the memory at ptr to the stream.

        :return: The number of bytes written.
        """
        if size == 0:
            return 0

        try:
            if not ptr:
                raise ValueError("Write from a NULL pointer")

            count = self.source.write(ctypes.string_at(ptr, size))
        except BlockingIOError as e:
            _set_status(status, Status.NOT_READY)
            return e.characters_written
        except io.UnsupportedOperation:
            _set_status(status, Status.READONLY)
            return 0
        except Exception:
            logger.debug("Failed to write to the stream.", exc_info=True)
            _set_status(status, Status.ERROR)
            return 0

        if count is None:
            _set_status(status, Status.NOT_READY)
            return 0
        return count

    def flush(self, status: Any) -> bool:
        """
        Make sure buffered data is written out.
        """
        try:
            self.source.flush()
        except Exception:
            logger.debug("Failed to flush the stream.", exc_info=True)
            _set_status(status, Status.ERROR)
            return False
        return True

    def close(self) -> bool:
        """
        Release the adapter.

        The adapter is released even if flushing fails. The Python stream itself stays open.
        """
        try:
            return self.flush(None)
        finally:
            self.unregister()


_adapters = Registry[StreamAdapter]("sdlengine.io_stream")
_lookup = _adapters.get


@SizeFunc
def _adapter_size(userdata: int | None) -> int:
    adapter = _lookup(userdata)
    return -1 if adapter is None else adapter.size()


@SeekFunc
def _adapter_seek(userdata: int | None, offset: int, whence: int) -> int:
    adapter = _lookup(userdata)
    return -1 if adapter is None else adapter.seek(offset, whence)


@ReadFunc
def _adapter_read(userdata: int | None, ptr: int | None, size: int, status: Any) -> int:
    adapter = _lookup(userdata)
    if adapter is None:
        _set_status(status, Status.ERROR)
        return 0
    return adapter.read(ptr, size, status)


@WriteFunc
def _adapter_write(userdata: int | None, ptr: int | None, size: int, status: Any) -> int:
    adapter = _lookup(userdata)
    if adapter is None:
        _set_status(status, Status.ERROR)
        return 0
    return adapter.write(ptr, size, status)


@FlushFunc
def _adapter_flush(userdata: int | None, status: Any) -> bool:
    adapter = _lookup(userdata)
    if adapter is None:
        _set_status(status, Status.ERROR)
        return False
    return adapter.flush(status)


@CloseFunc
def _adapter_close(userdata: int | None) -> bool:
    adapter = _lookup(userdata)
    return False if adapter is None else adapter.close()


#: The interface shared by every stream created with Stream.from_host().
INTERFACE = StreamInterface.new(
    _adapter_size, _adapter_seek, _adapter_read, _adapter_write, _adapter_flush, _adapter_close
)


_SDL_IOFromFile = bind("SDL_IOFromFile", [ctypes.c_char_p, ctypes.c_char_p], _IOStreamP)
_SDL_IOFromMem = bind("SDL_IOFromMem", [ctypes.c_void_p, ctypes.c_size_t], _IOStreamP)
_SDL_IOFromConstMem = bind("SDL_IOFromConstMem", [ctypes.c_void_p, ctypes.c_size_t], _IOStreamP)
_SDL_IOFromDynamicMem = bind("SDL_IOFromDynamicMem", [], _IOStreamP)
_SDL_OpenIO = bind("SDL_OpenIO", [ctypes.POINTER(StreamInterface), ctypes.c_void_p], _IOStreamP)
_SDL_CloseIO = bind("SDL_CloseIO", [_IOStreamP], ctypes.c_bool)
_SDL_GetIOProperties = bind("SDL_GetIOProperties", [_IOStreamP], ctypes.c_uint32)
_SDL_GetIOStatus = bind("SDL_GetIOStatus", [_IOStreamP], ctypes.c_int)
_SDL_GetIOSize = bind("SDL_GetIOSize", [_IOStreamP], ctypes.c_int64)
_SDL_SeekIO = bind("SDL_SeekIO", [_IOStreamP, ctypes.c_int64, ctypes.c_int], ctypes.c_int64)
_SDL_TellIO = bind("SDL_TellIO", [_IOStreamP], ctypes.c_int64)
_SDL_ReadIO = bind("SDL_ReadIO", [_IOStreamP, ctypes.c_void_p, ctypes.c_size_t], ctypes.c_size_t)
_SDL_WriteIO = bind("SDL_WriteIO", [_IOStreamP, ctypes.c_void_p, ctypes.c_size_t], ctypes.c_size_t)
_SDL_FlushIO = bind("SDL_FlushIO", [_IOStreamP], ctypes.c_bool)
_SDL_LoadFile_IO = bind(
    "SDL_LoadFile_IO", [_IOStreamP, ctypes.POINTER(ctypes.c_size_t), ctypes.c_bool], ctypes.c_void_p
)
_SDL_LoadFile = bind("SDL_LoadFile", [ctypes.c_char_p, ctypes.POINTER(ctypes.c_size_t)], ctypes.c_void_p)
_SDL_SaveFile_IO = bind("SDL_SaveFile_IO", [_IOStreamP, ctypes.c_void_p, ctypes.c_size_t, ctypes.c_bool], ctypes.c_bool)
_SDL_SaveFile = bind("SDL_SaveFile", [ctypes.c_char_p, ctypes.c_void_p, ctypes.c_size_t], ctypes.c_bool)


_STATUS_ERRORS: dict[Status, type[errors.StreamError]] = {
    Status.ERROR: errors.StreamIOError,
    Status.NOT_READY: errors.StreamNotReady,
    Status.READONLY: errors.StreamReadOnly,
    Status.WRITEONLY: errors.StreamWriteOnly,
}


def _status_error(status: Status) -> errors.StreamError | None:
    kind = _STATUS_ERRORS.get(status)
    if kind is None:
        return None
    return kind(errors.call_error_callback())


def _reader(name: str, ctype: Any) -> Callable[[Stream], int | None]:
    func = bind(name, [_IOStreamP, ctypes.POINTER(ctype)], ctypes.c_bool)

    def read(self: Stream) -> int | None:
        value = ctype()
        if func(self.pointer, ctypes.byref(value)):
            return value.value
        self._raise_for_status()
        return None

    read.__doc__ = f"Read a value with {name}. Returns None at the end of the stream."
    return read


def _writer(name: str, ctype: Any) -> Callable[[Stream, int], None]:
    func = bind(name, [_IOStreamP, ctype], ctypes.c_bool)

    def write(self: Stream, value: int) -> None:
        if func(self.pointer, value):
            return
        self._raise_for_status()
        raise errors.SdlError(errors.call_error_callback())

    write.__doc__ = f"Write a value with {name}."
    return write


@dataclass
class StreamProperties:
    """
    Properties that can be obtained from a stream.
    """

    #: Address and size of the memory of a stream made by Stream.from_mem() or Stream.from_const_mem().
    memory: int | None = None
    memory_size: int | None = None
    #: The internal memory of a stream made by Stream.from_dynamic_mem().
    #: Setting it to None transfers ownership of the memory to the application.
    dynamic_memory: int | None = None
    #: Memory will be allocated in multiples of this size, defaulting to 1024.
    dynamic_chunk_size: int | None = None
    windows_handle: int | None = None
    stdio_file: int | None = None
    file_descriptor: int | None = None
    android_aasset: int | None = None

    MEMORY_POINTER = "SDL.iostream.memory.base"
    MEMORY_SIZE_NUMBER = "SDL.iostream.memory.size"
    DYNAMIC_MEMORY_POINTER = "SDL.iostream.dynamic.memory"
    DYNAMIC_CHUNKSIZE_NUMBER = "SDL.iostream.dynamic.chunksize"
    WINDOWS_HANDLE_POINTER = "SDL.iostream.windows.handle"
    STDIO_FILE_POINTER = "SDL.iostream.stdio.file"
    FILE_DESCRIPTOR_NUMBER = "SDL.iostream.file_descriptor"
    ANDROID_AASSET_POINTER = "SDL.iostream.android.aasset"

    @classmethod
    def from_group(cls, group: properties.Group) -> Self:
        def number(name: str) -> int | None:
            return group.get_number(name) if group.has(name) else None

        return cls(
            memory=group.get_pointer(cls.MEMORY_POINTER),
            memory_size=number(cls.MEMORY_SIZE_NUMBER),
            dynamic_memory=group.get_pointer(cls.DYNAMIC_MEMORY_POINTER),
            dynamic_chunk_size=number(cls.DYNAMIC_CHUNKSIZE_NUMBER),
            windows_handle=group.get_pointer(cls.WINDOWS_HANDLE_POINTER),
            stdio_file=group.get_pointer(cls.STDIO_FILE_POINTER),
            file_descriptor=number(cls.FILE_DESCRIPTOR_NUMBER),
            android_aasset=group.get_pointer(cls.ANDROID_AASSET_POINTER),
        )

    def apply(self, group: properties.Group) -> None:
        """
        Write the properties back into the group. Unset fields are cleared.
        """

        def pointer(value: int | None) -> ctypes.c_void_p | None:
            return None if value is None else ctypes.c_void_p(value)

        group.set(self.MEMORY_POINTER, pointer(self.memory))
        group.set(self.MEMORY_SIZE_NUMBER, self.memory_size)
        group.set(self.DYNAMIC_MEMORY_POINTER, pointer(self.dynamic_memory))
        group.set(self.DYNAMIC_CHUNKSIZE_NUMBER, self.dynamic_chunk_size)
        group.set(self.WINDOWS_HANDLE_POINTER, pointer(self.windows_handle))
        group.set(self.STDIO_FILE_POINTER, pointer(self.stdio_file))
        group.set(self.FILE_DESCRIPTOR_NUMBER, self.file_descriptor)
        group.set(self.ANDROID_AASSET_POINTER, pointer(self.android_aasset))


class Stream(AbstractContextManager["Stream"]):
    """
    An SDL I/O stream (SDL_IOStream).

    Streams are closed when leaving the with-block.
    """

    __slots__ = ("_adapter", "_keepalive", "pointer")

    def __init__(self, pointer: Any, *, keepalive: Any = None, adapter: StreamAdapter | None = None) -> None:
        self.pointer = pointer
        self._keepalive = keepalive
        self._adapter = adapter

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Stream {'closed' if self.closed else hex(ctypes.addressof(self.pointer.contents))}>"

    @classmethod
    def open(cls, interface: StreamInterface, userdata: int | None = None) -> Self:
        """
        Create a stream from a custom interface.

        SDL copies the interface, but the callbacks it references must be kept alive by the caller.
        """
        return cls(errors.check_null(_SDL_OpenIO(ctypes.byref(interface), userdata)), keepalive=interface)

    @classmethod
    def from_file(cls, path: str | PathLike[str], mode: FileMode | str = FileMode.READ_BINARY) -> Self:
        """
        Open a named file.
        """
        mode_str = mode.value if isinstance(mode, FileMode) else mode
        encoded = fspath(path).encode("utf-8")
        return cls(errors.check_null(_SDL_IOFromFile(encoded, mode_str.encode("ascii"))))

    @classmethod
    def from_mem(cls, buffer: Buffer) -> Self:
        """
        Prepare a writable memory buffer for reading and writing.

        The buffer is not copied and must not be resized while the stream is open.
        """
        view = memoryview(buffer)
        area = (ctypes.c_char * view.nbytes).from_buffer(view)
        return cls(errors.check_null(_SDL_IOFromMem(area, view.nbytes)), keepalive=(view, area))

    @classmethod
    def from_const_mem(cls, data: Buffer) -> Self:
        """
        Prepare a read-only stream over a copy of the given data.

        Attempting to write to this stream reports an error.
        """
        raw = bytes(data)
        area = ctypes.create_string_buffer(raw, len(raw))
        return cls(errors.check_null(_SDL_IOFromConstMem(area, len(raw))), keepalive=area)

    @classmethod
    def from_dynamic_mem(cls) -> Self:
        """
        Create a stream that is backed by dynamically allocated memory.
        """
        return cls(errors.check_null(_SDL_IOFromDynamicMem()))

    @classmethod
    def from_host(cls, source: SeekableStream) -> Self:
        """
        Create a stream that reads from and writes to a Python stream.

        The Python stream must stay usable while the SDL stream is open.
        Closing the SDL stream does not close it.
        """
        adapter = StreamAdapter(source)
        handle = adapter.register()
        try:
            pointer = errors.check_null(_SDL_OpenIO(ctypes.byref(INTERFACE), handle))
        except BaseException:
            adapter.unregister()
            raise
        return cls(pointer, adapter=adapter)

    @property
    def closed(self) -> bool:
        return not self.pointer

    @contextmanager
    def _handed_over(self, close_io: bool) -> Iterator[Any]:
        """
        Yields the native stream for a call that closes it if close_io is set.

        The handle is invalidated up front in that case. The buffers and callbacks
        the native stream uses stay referenced until the block ends.
        """
        pointer = self.pointer
        if not close_io:
            yield pointer
            return

        held = self._keepalive, self._adapter
        self.pointer = _IOStreamP()
        self._keepalive = None
        self._adapter = None
        try:
            yield pointer
        finally:
            del held

    def close(self) -> None:
        """
        Close the stream.

        The stream is invalid afterwards, even if flushing its output failed.
        """
        if self.closed:
            return

        with self._handed_over(True) as pointer:
            errors.check_bool(_SDL_CloseIO(pointer))

    def __del__(self) -> None:
        if getattr(self, "pointer", None) is None or self.closed:
            return

        warnings.warn(f"Closing {self!r} inside __del__. This might cause leaks.", ResourceWarning)
        self.close()

    def flush(self) -> None:
        """
        Flush any buffered data in the stream.
        """
        errors.check_bool(_SDL_FlushIO(self.pointer))

    def get_status(self) -> Status:
        return Status(_SDL_GetIOStatus(self.pointer))

    def get_size(self) -> int:
        """
        :return: The size of the data stream.
        """
        return errors.check(_SDL_GetIOSize(self.pointer), -1)

    def get_properties(self) -> StreamProperties:
        return StreamProperties.from_group(self.properties)

    def set_properties(self, props: StreamProperties) -> None:
        props.apply(self.properties)

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetIOProperties(self.pointer)))

    def _raise_for_status(self) -> None:
        error = _status_error(self.get_status())
        if error is not None:
            raise error

    def read(self, size: int) -> bytes | None:
        """
        Read up to size bytes.

        :return: The bytes read, or None if the end of the stream was reached.
        """
        if size == 0:
            return b""

        buf = ctypes.create_string_buffer(size)
        count = _SDL_ReadIO(self.pointer, buf, size)
        if count == 0:
            self._raise_for_status()
            return None
        return buf.raw[:count]

    def write(self, data: Buffer) -> None:
        """
        Write all of data to the stream.

        :raises StreamError: When the stream fails. Its written-attribute contains the progress.
        """
        raw = bytes(data)
        count = _SDL_WriteIO(self.pointer, raw, len(raw))
        if count == len(raw):
            return

        error = _status_error(self.get_status())
        if error is None:
            return
        error.written = count  # type: ignore[attr-defined]
        raise error

    def seek(self, offset: int, whence: Whence = Whence.SET) -> int:
        """
        Seek within the stream.

        :return: The final offset in the data stream after the seek.
        """
        return errors.check(_SDL_SeekIO(self.pointer, offset, whence), -1)

    def tell(self) -> int:
        """
        :return: The current read/write offset in the stream.
        """
        return errors.check(_SDL_TellIO(self.pointer), -1)

    def load(self, close_io: bool = False) -> bytes:
        """
        Read all remaining data of the stream.

        :param close_io: Close the stream before returning, even on error.
        """
        size = ctypes.c_size_t()
        with self._handed_over(close_io) as pointer:
            data = errors.check_null(_SDL_LoadFile_IO(pointer, ctypes.byref(size), close_io))
        try:
            return ctypes.string_at(data, size.value)
        finally:
            stdinc.free(data)

    def save(self, data: Buffer, close_io: bool = False) -> None:
        """
        Write all of data into the stream.

        :param close_io: Close the stream before returning, even on error.
        """
        raw = bytes(data)
        with self._handed_over(close_io) as pointer:
            errors.check_bool(_SDL_SaveFile_IO(pointer, raw, len(raw), close_io))

    def as_file(self) -> StreamFile:
        """
        :return: A file-like view on the stream. Closing the view does not close the stream.
        """
        return StreamFile(self)

    read_u8 = _reader("SDL_ReadU8", ctypes.c_uint8)
    read_s8 = _reader("SDL_ReadS8", ctypes.c_int8)
    read_u16_le = _reader("SDL_ReadU16LE", ctypes.c_uint16)
    read_u16_be = _reader("SDL_ReadU16BE", ctypes.c_uint16)
    read_s16_le = _reader("SDL_ReadS16LE", ctypes.c_int16)
    read_s16_be = _reader("SDL_ReadS16BE", ctypes.c_int16)
    read_u32_le = _reader("SDL_ReadU32LE", ctypes.c_uint32)
    read_u32_be = _reader("SDL_ReadU32BE", ctypes.c_uint32)
    read_s32_le = _reader("SDL_ReadS32LE", ctypes.c_int32)
    read_s32_be = _reader("SDL_ReadS32BE", ctypes.c_int32)
    read_u64_le = _reader("SDL_ReadU64LE", ctypes.c_uint64)
    read_u64_be = _reader("SDL_ReadU64BE", ctypes.c_uint64)
    read_s64_le = _reader("SDL_ReadS64LE", ctypes.c_int64)
    read_s64_be = _reader("SDL_ReadS64BE", ctypes.c_int64)

    write_u8 = _writer("SDL_WriteU8", ctypes.c_uint8)
    write_s8 = _writer("SDL_WriteS8", ctypes.c_int8)
    write_u16_le = _writer("SDL_WriteU16LE", ctypes.c_uint16)
    write_u16_be = _writer("SDL_WriteU16BE", ctypes.c_uint16)
    write_s16_le = _writer("SDL_WriteS16LE", ctypes.c_int16)
    write_s16_be = _writer("SDL_WriteS16BE", ctypes.c_int16)
    write_u32_le = _writer("SDL_WriteU32LE", ctypes.c_uint32)
    write_u32_be = _writer("SDL_WriteU32BE", ctypes.c_uint32)
    write_s32_le = _writer("SDL_WriteS32LE", ctypes.c_int32)
    write_s32_be = _writer("SDL_WriteS32BE", ctypes.c_int32)
    write_u64_le = _writer("SDL_WriteU64LE", ctypes.c_uint64)
    write_u64_be = _writer("SDL_WriteU64BE", ctypes.c_uint64)
    write_s64_le = _writer("SDL_WriteS64LE", ctypes.c_int64)
    write_s64_be = _writer("SDL_WriteS64BE", ctypes.c_int64)


class StreamFile(io.RawIOBase):
    """
    Exposes a Stream through the io-module's interface.

    This allows using SDL streams with any Python code that expects a binary file.
    """

    def __init__(self, stream: Stream) -> None:
        super().__init__()
        self.stream = stream

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def readinto(self, buffer: Buffer) -> int | None:  # type: ignore[override]
        view = memoryview(buffer).cast("B")
        if not view.nbytes:
            return 0

        area = (ctypes.c_char * view.nbytes).from_buffer(view)
        count = _SDL_ReadIO(self.stream.pointer, area, view.nbytes)
        if count:
            return count

        status = self.stream.get_status()
        if status == Status.NOT_READY:
            return None
        self.stream._raise_for_status()
        return 0

    def write(self, buffer: Buffer) -> int | None:  # type: ignore[override]
        raw = bytes(buffer)
        count = _SDL_WriteIO(self.stream.pointer, raw, len(raw))
        if count == len(raw):
            return count

        status = self.stream.get_status()
        if status == Status.NOT_READY and count == 0:
            return None
        if count == 0:
            self.stream._raise_for_status()
        return count

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self.stream.seek(offset, Whence(whence))

    def tell(self) -> int:
        return self.stream.tell()

    def flush(self) -> None:
        if not self.closed and not self.stream.closed:
            self.stream.flush()


def load_file(path: str | PathLike[str]) -> bytes:
    """
    Load all the data from a file path.
    """
    size = ctypes.c_size_t()
    data = errors.check_null(_SDL_LoadFile(fspath(path).encode("utf-8"), ctypes.byref(size)))
    try:
        return ctypes.string_at(data, size.value)
    finally:
        stdinc.free(data)


def save_file(path: str | PathLike[str], data: Buffer) -> None:
    """
    Save all the data into a file path.
    """
    raw = bytes(data)
    errors.check_bool(_SDL_SaveFile(fspath(path).encode("utf-8"), raw, len(raw)))
