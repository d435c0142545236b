# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the audio module."""

import struct
from collections.abc import Iterator

import pytest

from sdlengine import audio
from sdlengine._testutils import requires_library, use_dummy_drivers
from sdlengine.audio import AudioFormat, AudioStream, Spec
from sdlengine.init import InitFlags, subsystems


class TestFormat:
    def test_define_format(self) -> None:
        assert audio.define_format(True, False, False, 16) == AudioFormat.S16LE == 0x8010
        assert audio.define_format(True, False, True, 32) == AudioFormat.F32LE == 0x8120
        assert audio.define_format(False, False, False, 8) == AudioFormat.U8 == 0x0008
        assert audio.define_format(True, True, False, 32) == AudioFormat.S32BE

    def test_sizes(self) -> None:
        assert audio.bit_size(AudioFormat.S16LE) == 16
        assert audio.byte_size(AudioFormat.S16LE) == 2
        assert audio.byte_size(AudioFormat.F32BE) == 4
        assert audio.byte_size(AudioFormat.U8) == 1

    def test_predicates(self) -> None:
        assert audio.is_float(AudioFormat.F32LE)
        assert audio.is_int(AudioFormat.S32LE)
        assert audio.is_big_endian(AudioFormat.S16BE)
        assert audio.is_little_endian(AudioFormat.S16LE)
        assert audio.is_signed(AudioFormat.S8)
        assert audio.is_unsigned(AudioFormat.U8)

    def test_native_aliases(self) -> None:
        assert AudioFormat.S16 in (AudioFormat.S16LE, AudioFormat.S16BE)
        assert AudioFormat.F32 in (AudioFormat.F32LE, AudioFormat.F32BE)


class TestSpec:
    def test_frame_size(self) -> None:
        assert Spec(AudioFormat.S16LE, 2, 48000).frame_size == 4
        assert audio.get_frame_size(Spec(AudioFormat.F32LE, 6, 48000)) == 24

    def test_round_trip(self) -> None:
        spec = Spec(AudioFormat.F32LE, 2, 44100)
        native = spec.to_sdl()
        assert (native.format, native.channels, native.freq) == (0x8120, 2, 44100)
        assert Spec.from_sdl(native) == spec


@requires_library
class TestAudioStream:
    @pytest.fixture(autouse=True)
    def audio_subsystem(self) -> Iterator[None]:
        with use_dummy_drivers(), subsystems(InitFlags.AUDIO):
            yield

    def test_current_driver(self) -> None:
        assert audio.get_current_driver() == "dummy"
        assert "dummy" in audio.get_drivers()

    def test_format_name(self) -> None:
        assert audio.get_format_name(AudioFormat.S16LE) == "SDL_AUDIO_S16LE"

    def test_silence(self) -> None:
        assert audio.get_silence_value(AudioFormat.U8) == 0x80
        assert audio.get_silence_value(AudioFormat.S16LE) == 0

    def test_passthrough(self) -> None:
        spec = Spec(AudioFormat.F32, 1, 48000)
        data = struct.pack("=4f", 0.5, -0.25, 0.0, 1.0)

        with AudioStream.create(spec, spec) as stream:
            stream.put_data(data)
            stream.flush()
            assert stream.get_available() == len(data)
            assert stream.get_data(len(data)) == data

    def test_channel_conversion(self) -> None:
        mono = Spec(AudioFormat.F32, 1, 48000)
        stereo = Spec(AudioFormat.F32, 2, 48000)

        with AudioStream.create(mono, stereo) as stream:
            assert stream.get_format() == (mono, stereo)
            stream.put_data(struct.pack("=4f", 0.5, 0.5, 0.5, 0.5))
            stream.flush()
            assert stream.get_available() == 32

    def test_clear(self) -> None:
        spec = Spec(AudioFormat.S16, 2, 48000)
        with AudioStream.create(spec, spec) as stream:
            stream.put_data(bytes(64))
            stream.clear()
            assert stream.get_available() == 0

    def test_put_callback(self) -> None:
        spec = Spec(AudioFormat.S16, 1, 48000)
        seen: list[tuple[int, int]] = []

        with AudioStream.create(spec, spec) as stream:
            stream.set_put_callback(lambda s, additional, total: seen.append((additional, total)))
            stream.put_data(bytes(8))
            stream.set_put_callback(None)
            stream.put_data(bytes(8))

        assert len(seen) == 1
        assert seen[0][0] == 8

    def test_gain(self) -> None:
        spec = Spec(AudioFormat.S16, 1, 48000)
        with AudioStream.create(spec, spec) as stream:
            stream.set_gain(0.5)
            assert stream.get_gain() == 0.5
