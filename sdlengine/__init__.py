# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
sdlengine - Python bindings for SDL3, one module per SDL header.

SDL3 is loaded the first time a native function is called. Set
SDLENGINE_LIBRARY to point at a specific build.

Parts:
- errors:     SDL's error string as exceptions, plus an optional error callback.
- io_stream:  SDL_IOStream, including streams backed by Python file objects.
- init:       Subsystem initialization and application metadata.
- hints, log, properties, version: Configuration and diagnostics.
- rect, pixels, blend_mode, surface: Software pixel manipulation.
- video, render, vulkan: Windows, displays and 2D rendering.
- audio, camera: Audio devices, audio streams and video capture.
- keyboard, mouse, joystick, haptic, events: Input devices, force feedback and the event queue.
- filesystem: Paths, directories and globbing.
- time, timer: Calendar time, ticks and timers.
- platform, system, cpu_info, power, locale, clipboard: System information.
"""
