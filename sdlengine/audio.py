# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine.audio wraps SDL's audio devices and audio streams.

Audio is played by binding AudioStreams to a Device. Streams convert
between the format of the data put into them and the format of the device:

    >>> spec = Spec(AudioFormat.F32, channels=2, freq=48000)
    >>> with AudioStream.open_device_stream(Device.DEFAULT_PLAYBACK, spec) as stream:
    ...     stream.put_data(samples)
    ...     stream.resume_device()

Streams can be fed from a Python callback as well. Callbacks run on SDL's
audio thread. Exceptions raised by them are logged and swallowed.
"""

from __future__ import annotations

import ctypes
import sys
from collections.abc import Buffer, Callable, Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import IntEnum
from logging import getLogger
from os import PathLike, fspath
from types import TracebackType
from typing import Any, ClassVar, Self

from . import errors, properties, stdinc
from ._callbacks import Registry
from ._dll import bind
from .io_stream import Stream, _IOStreamP

__all__ = [
    "AudioFormat",
    "AudioSpec",
    "AudioStream",
    "AudioStreamCallback",
    "Device",
    "Spec",
    "bit_size",
    "byte_size",
    "convert_samples",
    "define_format",
    "get_current_driver",
    "get_drivers",
    "get_format_name",
    "get_frame_size",
    "get_playback_devices",
    "get_recording_devices",
    "get_silence_value",
    "is_big_endian",
    "is_float",
    "is_int",
    "is_little_endian",
    "is_signed",
    "is_unsigned",
    "load_wav",
    "load_wav_io",
    "mix_audio",
]


logger = getLogger(__name__)

_MASK_BITSIZE = 0xFF
_MASK_FLOAT = 1 << 8
_MASK_BIG_ENDIAN = 1 << 12
_MASK_SIGNED = 1 << 15


def define_format(signed: bool, big_endian: bool, float: bool, size: int) -> int:
    return (int(signed) << 15) | (int(big_endian) << 12) | (int(float) << 8) | (size & _MASK_BITSIZE)


class AudioFormat(IntEnum):
    """
    Audio format.

    S16, S32 and F32 are aliases for the native byte order of the running platform.
    """

    UNKNOWN = 0x0000
    U8 = 0x0008
    S8 = 0x8008
    S16LE = 0x8010
    S16BE = 0x9010
    S32LE = 0x8020
    S32BE = 0x9020
    F32LE = 0x8120
    F32BE = 0x9120

    if sys.byteorder == "big":
        S16 = S16BE
        S32 = S32BE
        F32 = F32BE
    else:
        S16 = S16LE
        S32 = S32LE
        F32 = F32LE


def bit_size(fmt: int) -> int:
    return fmt & _MASK_BITSIZE


def byte_size(fmt: int) -> int:
    return bit_size(fmt) // 8


def is_float(fmt: int) -> bool:
    return bool(fmt & _MASK_FLOAT)


def is_int(fmt: int) -> bool:
    return not is_float(fmt)


def is_big_endian(fmt: int) -> bool:
    return bool(fmt & _MASK_BIG_ENDIAN)


def is_little_endian(fmt: int) -> bool:
    return not is_big_endian(fmt)


def is_signed(fmt: int) -> bool:
    return bool(fmt & _MASK_SIGNED)


def is_unsigned(fmt: int) -> bool:
    return not is_signed(fmt)


class AudioSpec(ctypes.Structure):
    """
    The native layout of an audio format specification (SDL_AudioSpec).
    """

    _fields_ = [("format", ctypes.c_int), ("channels", ctypes.c_int), ("freq", ctypes.c_int)]


@dataclass(frozen=True, slots=True)
class Spec:
    """
    Format specifier for audio data.
    """

    format: AudioFormat
    channels: int
    freq: int

    @classmethod
    def from_sdl(cls, spec: AudioSpec) -> Self:
        return cls(AudioFormat(spec.format), spec.channels, spec.freq)

    def to_sdl(self) -> AudioSpec:
        return AudioSpec(self.format, self.channels, self.freq)

    @property
    def frame_size(self) -> int:
        """
        The size of a single sample frame in bytes.
        """
        return get_frame_size(self)


def get_frame_size(spec: Spec) -> int:
    return byte_size(spec.format) * spec.channels


_AudioSpecP = ctypes.POINTER(AudioSpec)
_IntP = ctypes.POINTER(ctypes.c_int)


class _AudioStream(ctypes.Structure):
    pass


_AudioStreamP = ctypes.POINTER(_AudioStream)
_NativeAudioStreamCallback = ctypes.CFUNCTYPE(None, ctypes.c_void_p, _AudioStreamP, ctypes.c_int, ctypes.c_int)

_SDL_GetNumAudioDrivers = bind("SDL_GetNumAudioDrivers", [], ctypes.c_int)
_SDL_GetAudioDriver = bind("SDL_GetAudioDriver", [ctypes.c_int], ctypes.c_char_p)
_SDL_GetCurrentAudioDriver = bind("SDL_GetCurrentAudioDriver", [], ctypes.c_char_p)
_SDL_GetAudioPlaybackDevices = bind("SDL_GetAudioPlaybackDevices", [_IntP], ctypes.POINTER(ctypes.c_uint32))
_SDL_GetAudioRecordingDevices = bind("SDL_GetAudioRecordingDevices", [_IntP], ctypes.POINTER(ctypes.c_uint32))
_SDL_GetAudioDeviceName = bind("SDL_GetAudioDeviceName", [ctypes.c_uint32], ctypes.c_char_p)
_SDL_GetAudioDeviceFormat = bind("SDL_GetAudioDeviceFormat", [ctypes.c_uint32, _AudioSpecP, _IntP], ctypes.c_bool)
_SDL_GetAudioDeviceChannelMap = bind("SDL_GetAudioDeviceChannelMap", [ctypes.c_uint32, _IntP], _IntP)
_SDL_OpenAudioDevice = bind("SDL_OpenAudioDevice", [ctypes.c_uint32, _AudioSpecP], ctypes.c_uint32)
_SDL_IsAudioDevicePhysical = bind("SDL_IsAudioDevicePhysical", [ctypes.c_uint32], ctypes.c_bool)
_SDL_IsAudioDevicePlayback = bind("SDL_IsAudioDevicePlayback", [ctypes.c_uint32], ctypes.c_bool)
_SDL_PauseAudioDevice = bind("SDL_PauseAudioDevice", [ctypes.c_uint32], ctypes.c_bool)
_SDL_ResumeAudioDevice = bind("SDL_ResumeAudioDevice", [ctypes.c_uint32], ctypes.c_bool)
_SDL_AudioDevicePaused = bind("SDL_AudioDevicePaused", [ctypes.c_uint32], ctypes.c_bool)
_SDL_GetAudioDeviceGain = bind("SDL_GetAudioDeviceGain", [ctypes.c_uint32], ctypes.c_float)
_SDL_SetAudioDeviceGain = bind("SDL_SetAudioDeviceGain", [ctypes.c_uint32, ctypes.c_float], ctypes.c_bool)
_SDL_CloseAudioDevice = bind("SDL_CloseAudioDevice", [ctypes.c_uint32], None)
_SDL_BindAudioStreams = bind(
    "SDL_BindAudioStreams", [ctypes.c_uint32, ctypes.POINTER(_AudioStreamP), ctypes.c_int], ctypes.c_bool
)
_SDL_UnbindAudioStreams = bind("SDL_UnbindAudioStreams", [ctypes.POINTER(_AudioStreamP), ctypes.c_int], None)
_SDL_GetAudioStreamDevice = bind("SDL_GetAudioStreamDevice", [_AudioStreamP], ctypes.c_uint32)
_SDL_CreateAudioStream = bind("SDL_CreateAudioStream", [_AudioSpecP, _AudioSpecP], _AudioStreamP)
_SDL_GetAudioStreamProperties = bind("SDL_GetAudioStreamProperties", [_AudioStreamP], ctypes.c_uint32)
_SDL_GetAudioStreamFormat = bind(
    "SDL_GetAudioStreamFormat", [_AudioStreamP, _AudioSpecP, _AudioSpecP], ctypes.c_bool
)
_SDL_SetAudioStreamFormat = bind(
    "SDL_SetAudioStreamFormat", [_AudioStreamP, _AudioSpecP, _AudioSpecP], ctypes.c_bool
)
_SDL_GetAudioStreamFrequencyRatio = bind("SDL_GetAudioStreamFrequencyRatio", [_AudioStreamP], ctypes.c_float)
_SDL_SetAudioStreamFrequencyRatio = bind(
    "SDL_SetAudioStreamFrequencyRatio", [_AudioStreamP, ctypes.c_float], ctypes.c_bool
)
_SDL_GetAudioStreamGain = bind("SDL_GetAudioStreamGain", [_AudioStreamP], ctypes.c_float)
_SDL_SetAudioStreamGain = bind("SDL_SetAudioStreamGain", [_AudioStreamP, ctypes.c_float], ctypes.c_bool)
_SDL_GetAudioStreamInputChannelMap = bind("SDL_GetAudioStreamInputChannelMap", [_AudioStreamP, _IntP], _IntP)
_SDL_GetAudioStreamOutputChannelMap = bind("SDL_GetAudioStreamOutputChannelMap", [_AudioStreamP, _IntP], _IntP)
_SDL_SetAudioStreamInputChannelMap = bind(
    "SDL_SetAudioStreamInputChannelMap", [_AudioStreamP, _IntP, ctypes.c_int], ctypes.c_bool
)
_SDL_SetAudioStreamOutputChannelMap = bind(
    "SDL_SetAudioStreamOutputChannelMap", [_AudioStreamP, _IntP, ctypes.c_int], ctypes.c_bool
)
_SDL_PutAudioStreamData = bind("SDL_PutAudioStreamData", [_AudioStreamP, ctypes.c_void_p, ctypes.c_int], ctypes.c_bool)
_SDL_GetAudioStreamData = bind("SDL_GetAudioStreamData", [_AudioStreamP, ctypes.c_void_p, ctypes.c_int], ctypes.c_int)
_SDL_GetAudioStreamAvailable = bind("SDL_GetAudioStreamAvailable", [_AudioStreamP], ctypes.c_int)
_SDL_GetAudioStreamQueued = bind("SDL_GetAudioStreamQueued", [_AudioStreamP], ctypes.c_int)
_SDL_FlushAudioStream = bind("SDL_FlushAudioStream", [_AudioStreamP], ctypes.c_bool)
_SDL_ClearAudioStream = bind("SDL_ClearAudioStream", [_AudioStreamP], ctypes.c_bool)
_SDL_PauseAudioStreamDevice = bind("SDL_PauseAudioStreamDevice", [_AudioStreamP], ctypes.c_bool)
_SDL_ResumeAudioStreamDevice = bind("SDL_ResumeAudioStreamDevice", [_AudioStreamP], ctypes.c_bool)
_SDL_AudioStreamDevicePaused = bind("SDL_AudioStreamDevicePaused", [_AudioStreamP], ctypes.c_bool)
_SDL_LockAudioStream = bind("SDL_LockAudioStream", [_AudioStreamP], ctypes.c_bool)
_SDL_UnlockAudioStream = bind("SDL_UnlockAudioStream", [_AudioStreamP], ctypes.c_bool)
_SDL_SetAudioStreamGetCallback = bind(
    "SDL_SetAudioStreamGetCallback", [_AudioStreamP, _NativeAudioStreamCallback, ctypes.c_void_p], ctypes.c_bool
)
_SDL_SetAudioStreamPutCallback = bind(
    "SDL_SetAudioStreamPutCallback", [_AudioStreamP, _NativeAudioStreamCallback, ctypes.c_void_p], ctypes.c_bool
)
_SDL_DestroyAudioStream = bind("SDL_DestroyAudioStream", [_AudioStreamP], None)
_SDL_OpenAudioDeviceStream = bind(
    "SDL_OpenAudioDeviceStream",
    [ctypes.c_uint32, _AudioSpecP, _NativeAudioStreamCallback, ctypes.c_void_p],
    _AudioStreamP,
)
_SDL_LoadWAV_IO = bind(
    "SDL_LoadWAV_IO",
    [_IOStreamP, ctypes.c_bool, _AudioSpecP, ctypes.POINTER(ctypes.c_void_p), ctypes.POINTER(ctypes.c_uint32)],
    ctypes.c_bool,
)
_SDL_LoadWAV = bind(
    "SDL_LoadWAV",
    [ctypes.c_char_p, _AudioSpecP, ctypes.POINTER(ctypes.c_void_p), ctypes.POINTER(ctypes.c_uint32)],
    ctypes.c_bool,
)
_SDL_MixAudio = bind(
    "SDL_MixAudio", [ctypes.c_void_p, ctypes.c_void_p, ctypes.c_int, ctypes.c_uint32, ctypes.c_float], ctypes.c_bool
)
_SDL_ConvertAudioSamples = bind(
    "SDL_ConvertAudioSamples",
    [_AudioSpecP, ctypes.c_void_p, ctypes.c_int, _AudioSpecP, ctypes.POINTER(ctypes.c_void_p), _IntP],
    ctypes.c_bool,
)
_SDL_GetAudioFormatName = bind("SDL_GetAudioFormatName", [ctypes.c_int], ctypes.c_char_p)
_SDL_GetSilenceValueForFormat = bind("SDL_GetSilenceValueForFormat", [ctypes.c_int], ctypes.c_int)


def _decode(raw: bytes | None) -> str | None:
    return None if raw is None else raw.decode("utf-8")


def get_drivers() -> list[str]:
    """
    :return: The names of the audio drivers built into SDL, in the order they are tried.
    """
    return [_SDL_GetAudioDriver(i).decode("utf-8") for i in range(_SDL_GetNumAudioDrivers())]


def get_current_driver() -> str | None:
    """
    :return: The name of the current audio driver or None if no driver has been initialized.
    """
    return _decode(_SDL_GetCurrentAudioDriver())


def get_format_name(fmt: int) -> str:
    return _SDL_GetAudioFormatName(fmt).decode("utf-8")


def get_silence_value(fmt: int) -> int:
    """
    :return: The byte value that represents silence for the given format.
    """
    return _SDL_GetSilenceValueForFormat(fmt)


class Device:
    """
    An audio device (SDL_AudioDeviceID).

    Physical devices are reported by get_playback_devices() and get_recording_devices().
    Opening a device returns a logical device, which has to be closed again.
    """

    DEFAULT_PLAYBACK: ClassVar[Device]
    DEFAULT_RECORDING: ClassVar[Device]

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Device) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"<Device {self.value:#x}>"

    def open(self, spec: Spec | None = None) -> Device:
        """
        Open a logical device on this physical device (or on one of the defaults).

        :param spec: The requested format, or None for a reasonable default.
        """
        native = None if spec is None else ctypes.byref(spec.to_sdl())
        return Device(errors.check_id(_SDL_OpenAudioDevice(self.value, native)))

    def close(self) -> None:
        """
        Close the logical device. Bound streams are unbound.
        """
        _SDL_CloseAudioDevice(self.value)

    @property
    def name(self) -> str:
        return errors.check_null(_SDL_GetAudioDeviceName(self.value)).decode("utf-8")

    def get_format(self) -> tuple[Spec, int]:
        """
        :return: The current format and the buffer size in sample frames.
        """
        spec = AudioSpec()
        frames = ctypes.c_int()
        errors.check_bool(_SDL_GetAudioDeviceFormat(self.value, ctypes.byref(spec), ctypes.byref(frames)))
        return Spec.from_sdl(spec), frames.value

    def get_channel_map(self) -> list[int] | None:
        """
        :return: The channel map, or None if it is the default.
        """
        count = ctypes.c_int()
        array = _SDL_GetAudioDeviceChannelMap(self.value, ctypes.byref(count))
        if not array:
            return None
        return stdinc.take_array(array, count.value)

    def is_physical(self) -> bool:
        return bool(_SDL_IsAudioDevicePhysical(self.value))

    def is_playback(self) -> bool:
        return bool(_SDL_IsAudioDevicePlayback(self.value))

    def pause(self) -> None:
        """
        Pause audio playback on the logical device.
        """
        errors.check_bool(_SDL_PauseAudioDevice(self.value))

    def resume(self) -> None:
        errors.check_bool(_SDL_ResumeAudioDevice(self.value))

    def is_paused(self) -> bool:
        return bool(_SDL_AudioDevicePaused(self.value))

    def get_gain(self) -> float:
        return errors.check(_SDL_GetAudioDeviceGain(self.value), -1.0)

    def set_gain(self, gain: float) -> None:
        """
        :param gain: 1.0 is no change, 0.0 is silence.
        """
        errors.check_bool(_SDL_SetAudioDeviceGain(self.value, gain))

    def bind(self, *streams: AudioStream) -> None:
        """
        Bind audio streams to the logical device.
        """
        array = (_AudioStreamP * len(streams))(*(s.pointer for s in streams))
        errors.check_bool(_SDL_BindAudioStreams(self.value, array, len(streams)))

    @staticmethod
    def unbind(*streams: AudioStream) -> None:
        array = (_AudioStreamP * len(streams))(*(s.pointer for s in streams))
        _SDL_UnbindAudioStreams(array, len(streams))


Device.DEFAULT_PLAYBACK = Device(0xFFFFFFFF)
Device.DEFAULT_RECORDING = Device(0xFFFFFFFE)


def _devices(func: Any) -> list[Device]:
    count = ctypes.c_int()
    array = errors.check_null(func(ctypes.byref(count)))
    return [Device(value) for value in stdinc.take_array(array, count.value)]


def get_playback_devices() -> list[Device]:
    return _devices(_SDL_GetAudioPlaybackDevices)


def get_recording_devices() -> list[Device]:
    return _devices(_SDL_GetAudioRecordingDevices)


type AudioStreamCallback = Callable[[AudioStream, int, int], None]

_callbacks = Registry[tuple["AudioStream", AudioStreamCallback]]("sdlengine.audio")


@_NativeAudioStreamCallback
def _dispatch(userdata: int | None, _stream: Any, additional: int, total: int) -> None:
    entry = _callbacks.get(userdata)
    if entry is None:
        return

    stream, callback = entry
    try:
        callback(stream, additional, total)
    except Exception:
        logger.exception("Audio stream callback failed.")


class AudioStream(AbstractContextManager["AudioStream"]):
    """
    Converts audio data between formats (SDL_AudioStream).
    """

    __slots__ = ("_handles", "pointer")

    def __init__(self, pointer: ctypes._Pointer[_AudioStream]) -> None:
        self.pointer = pointer
        self._handles: dict[str, int] = {}

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"<AudioStream {'destroyed' if not self.pointer else hex(ctypes.addressof(self.pointer.contents))}>"

    @classmethod
    def create(cls, src: Spec, dst: Spec) -> Self:
        return cls(errors.check_null(_SDL_CreateAudioStream(ctypes.byref(src.to_sdl()), ctypes.byref(dst.to_sdl()))))

    @classmethod
    def open_device_stream(
        cls, device: Device, spec: Spec | None = None, callback: AudioStreamCallback | None = None
    ) -> Self:
        """
        Open a device and create a stream bound to it, in one step.

        The device starts paused. Destroying the stream closes the device.

        :param callback: Called whenever the device needs more data (or has recorded data).
        """
        native_spec = None if spec is None else ctypes.byref(spec.to_sdl())
        if callback is None:
            return cls(errors.check_null(_SDL_OpenAudioDeviceStream(device.value, native_spec, None, None)))

        stream = cls(_AudioStreamP())
        handle = _callbacks.add((stream, callback))
        try:
            stream.pointer = errors.check_null(
                _SDL_OpenAudioDeviceStream(device.value, native_spec, _dispatch, handle)
            )
        except errors.SdlError:
            _callbacks.pop(handle)
            raise
        stream._handles["device"] = handle
        return stream

    def destroy(self) -> None:
        """
        Free the audio stream. A bound stream is unbound first.
        """
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _AudioStreamP()
        _SDL_DestroyAudioStream(pointer)
        for handle in self._handles.values():
            _callbacks.pop(handle)
        self._handles.clear()

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetAudioStreamProperties(self.pointer)))

    @property
    def device(self) -> Device | None:
        """
        The logical device the stream is bound to, if any.
        """
        value = _SDL_GetAudioStreamDevice(self.pointer)
        return Device(value) if value else None

    def get_format(self) -> tuple[Spec, Spec]:
        """
        :return: The input and output formats.
        """
        src, dst = AudioSpec(), AudioSpec()
        errors.check_bool(_SDL_GetAudioStreamFormat(self.pointer, ctypes.byref(src), ctypes.byref(dst)))
        return Spec.from_sdl(src), Spec.from_sdl(dst)

    def set_format(self, src: Spec | None = None, dst: Spec | None = None) -> None:
        """
        Change the input or output format. None leaves the format unchanged.
        """
        errors.check_bool(
            _SDL_SetAudioStreamFormat(
                self.pointer,
                None if src is None else ctypes.byref(src.to_sdl()),
                None if dst is None else ctypes.byref(dst.to_sdl()),
            )
        )

    def get_frequency_ratio(self) -> float:
        return errors.check(_SDL_GetAudioStreamFrequencyRatio(self.pointer), 0.0)

    def set_frequency_ratio(self, ratio: float) -> None:
        """
        :param ratio: Between 0.01 and 100. 1.0 is normal speed.
        """
        errors.check_bool(_SDL_SetAudioStreamFrequencyRatio(self.pointer, ratio))

    def get_gain(self) -> float:
        return errors.check(_SDL_GetAudioStreamGain(self.pointer), -1.0)

    def set_gain(self, gain: float) -> None:
        errors.check_bool(_SDL_SetAudioStreamGain(self.pointer, gain))

    def _channel_map(self, func: Any) -> list[int] | None:
        count = ctypes.c_int()
        array = func(self.pointer, ctypes.byref(count))
        if not array:
            return None
        return stdinc.take_array(array, count.value)

    def get_input_channel_map(self) -> list[int] | None:
        return self._channel_map(_SDL_GetAudioStreamInputChannelMap)

    def get_output_channel_map(self) -> list[int] | None:
        return self._channel_map(_SDL_GetAudioStreamOutputChannelMap)

    def set_input_channel_map(self, channel_map: Sequence[int] | None) -> None:
        """
        :param channel_map: The new map, or None to reset to the default.
        """
        array = None if channel_map is None else (ctypes.c_int * len(channel_map))(*channel_map)
        errors.check_bool(_SDL_SetAudioStreamInputChannelMap(self.pointer, array, len(channel_map or ())))

    def set_output_channel_map(self, channel_map: Sequence[int] | None) -> None:
        array = None if channel_map is None else (ctypes.c_int * len(channel_map))(*channel_map)
        errors.check_bool(_SDL_SetAudioStreamOutputChannelMap(self.pointer, array, len(channel_map or ())))

    def put_data(self, data: Buffer) -> None:
        """
        Add data to the stream. The data is copied.
        """
        raw = bytes(data)
        errors.check_bool(_SDL_PutAudioStreamData(self.pointer, raw, len(raw)))

    def get_data(self, size: int) -> bytes:
        """
        Get converted data from the stream.

        :return: Up to size bytes. Fewer bytes are returned if less data is available.
        """
        buf = ctypes.create_string_buffer(size)
        count = errors.check(_SDL_GetAudioStreamData(self.pointer, buf, size), -1)
        return buf.raw[:count]

    def get_available(self) -> int:
        """
        :return: The number of converted bytes available.
        """
        return errors.check(_SDL_GetAudioStreamAvailable(self.pointer), -1)

    def get_queued(self) -> int:
        """
        :return: The number of input bytes queued, not yet converted.
        """
        return errors.check(_SDL_GetAudioStreamQueued(self.pointer), -1)

    def flush(self) -> None:
        """
        Convert all remaining data, even if it is not enough for the resampler.
        """
        errors.check_bool(_SDL_FlushAudioStream(self.pointer))

    def clear(self) -> None:
        """
        Drop all queued and converted data.
        """
        errors.check_bool(_SDL_ClearAudioStream(self.pointer))

    def pause_device(self) -> None:
        errors.check_bool(_SDL_PauseAudioStreamDevice(self.pointer))

    def resume_device(self) -> None:
        errors.check_bool(_SDL_ResumeAudioStreamDevice(self.pointer))

    def is_device_paused(self) -> bool:
        return bool(_SDL_AudioStreamDevicePaused(self.pointer))

    def lock(self) -> None:
        errors.check_bool(_SDL_LockAudioStream(self.pointer))

    def unlock(self) -> None:
        errors.check_bool(_SDL_UnlockAudioStream(self.pointer))

    @contextmanager
    def locked(self) -> Iterator[Self]:
        self.lock()
        try:
            yield self
        finally:
            self.unlock()

    def _set_callback(self, kind: str, setter: Any, callback: AudioStreamCallback | None) -> None:
        previous = self._handles.pop(kind, None)
        if callback is None:
            errors.check_bool(setter(self.pointer, _NativeAudioStreamCallback(), None))
        else:
            handle = _callbacks.add((self, callback))
            try:
                errors.check_bool(setter(self.pointer, _dispatch, handle))
            except errors.SdlError:
                _callbacks.pop(handle)
                raise
            self._handles[kind] = handle
        _callbacks.pop(previous)

    def set_get_callback(self, callback: AudioStreamCallback | None) -> None:
        """
        Set a callback that runs when data is requested from the stream.

        :param callback: Called with the stream, the amount of bytes needed and the total amount requested.
        """
        self._set_callback("get", _SDL_SetAudioStreamGetCallback, callback)

    def set_put_callback(self, callback: AudioStreamCallback | None) -> None:
        """
        Set a callback that runs when data is added to the stream.
        """
        self._set_callback("put", _SDL_SetAudioStreamPutCallback, callback)


def _take_buffer(pointer: ctypes.c_void_p, size: int) -> bytes:
    try:
        return ctypes.string_at(pointer, size)
    finally:
        stdinc.free(pointer)


def load_wav(path: str | PathLike[str]) -> tuple[Spec, bytes]:
    """
    Load the audio data of a WAVE file.
    """
    spec = AudioSpec()
    buf = ctypes.c_void_p()
    length = ctypes.c_uint32()
    errors.check_bool(
        _SDL_LoadWAV(fspath(path).encode("utf-8"), ctypes.byref(spec), ctypes.byref(buf), ctypes.byref(length))
    )
    return Spec.from_sdl(spec), _take_buffer(buf, length.value)


def load_wav_io(stream: Stream, close_io: bool = False) -> tuple[Spec, bytes]:
    """
    Load the audio data of a WAVE file from a stream.

    :param close_io: Close the stream before returning, even on error.
    """
    spec = AudioSpec()
    buf = ctypes.c_void_p()
    length = ctypes.c_uint32()
    with stream._handed_over(close_io) as src:
        errors.check_bool(
            _SDL_LoadWAV_IO(src, close_io, ctypes.byref(spec), ctypes.byref(buf), ctypes.byref(length))
        )
    return Spec.from_sdl(spec), _take_buffer(buf, length.value)


def mix_audio(dst: Buffer, src: Buffer, fmt: AudioFormat, volume: float = 1.0) -> None:
    """
    Mix audio data into dst.

    Both buffers must have the same size and contain samples in the given format.

    :param volume: 1.0 mixes at full volume, 0.0 leaves dst unchanged.
    """
    dst_view = memoryview(dst)
    if dst_view.readonly:
        raise ValueError("The destination buffer must be writable")

    raw = bytes(src)
    if len(raw) != dst_view.nbytes:
        raise ValueError("Source and destination sizes differ")

    area = (ctypes.c_char * dst_view.nbytes).from_buffer(dst_view)
    errors.check_bool(_SDL_MixAudio(area, raw, fmt, len(raw), volume))


def convert_samples(src_spec: Spec, data: Buffer, dst_spec: Spec) -> bytes:
    """
    Convert audio data to a different format.
    """
    raw = bytes(data)
    out = ctypes.c_void_p()
    out_len = ctypes.c_int()
    errors.check_bool(
        _SDL_ConvertAudioSamples(
            ctypes.byref(src_spec.to_sdl()),
            raw,
            len(raw),
            ctypes.byref(dst_spec.to_sdl()),
            ctypes.byref(out),
            ctypes.byref(out_len),
        )
    )
    return _take_buffer(out, out_len.value)
