# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Video capture from cameras.

Opening a camera may ask the user for permission. Frames only arrive once
the permission has been granted:

    >>> with Camera.open(get_cameras()[0]) as camera:
    ...     with camera.frame() as (surface, timestamp):
    ...         if surface is not None:
    ...             process(surface)
"""

from __future__ import annotations

import ctypes
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from enum import IntEnum
from logging import getLogger
from types import TracebackType
from typing import Self

from . import errors, properties, stdinc
from ._dll import bind
from .pixels import Colorspace, PixelFormat
from .surface import Surface, _SurfaceP

__all__ = [
    "Camera",
    "CameraPosition",
    "CameraSpec",
    "PermissionState",
    "get_cameras",
    "get_current_driver",
    "get_drivers",
    "get_name",
    "get_position",
    "get_supported_formats",
]


logger = getLogger(__name__)


class PermissionState(IntEnum):
    DENIED = -1
    AWAITING = 0
    APPROVED = 1


class CameraPosition(IntEnum):
    UNKNOWN = 0
    FRONT_FACING = 1
    BACK_FACING = 2


class _CameraSpec(ctypes.Structure):
    _fields_ = [
        ("format", ctypes.c_uint32),
        ("colorspace", ctypes.c_uint32),
        ("width", ctypes.c_int),
        ("height", ctypes.c_int),
        ("framerate_numerator", ctypes.c_int),
        ("framerate_denominator", ctypes.c_int),
    ]


@dataclass(frozen=True, slots=True)
class CameraSpec:
    """
    An output format of a camera.

    An unknown format or colorspace is None.
    """

    format: PixelFormat | None
    colorspace: Colorspace | None
    width: int
    height: int
    framerate_numerator: int
    framerate_denominator: int = 1

    @property
    def framerate(self) -> float:
        return self.framerate_numerator / self.framerate_denominator

    @classmethod
    def from_sdl(cls, value: _CameraSpec) -> Self:
        return cls(
            None if value.format == PixelFormat.UNKNOWN else PixelFormat(value.format),
            None if value.colorspace == Colorspace.UNKNOWN else Colorspace(value.colorspace),
            value.width,
            value.height,
            value.framerate_numerator,
            value.framerate_denominator,
        )

    def to_sdl(self) -> _CameraSpec:
        return _CameraSpec(
            PixelFormat.UNKNOWN if self.format is None else self.format,
            Colorspace.UNKNOWN if self.colorspace is None else self.colorspace,
            self.width,
            self.height,
            self.framerate_numerator,
            self.framerate_denominator,
        )


class _Camera(ctypes.Structure):
    pass


_CameraP = ctypes.POINTER(_Camera)
_CameraSpecP = ctypes.POINTER(_CameraSpec)
_ID = ctypes.c_uint32

_SDL_GetNumCameraDrivers = bind("SDL_GetNumCameraDrivers", [], ctypes.c_int)
_SDL_GetCameraDriver = bind("SDL_GetCameraDriver", [ctypes.c_int], ctypes.c_char_p)
_SDL_GetCurrentCameraDriver = bind("SDL_GetCurrentCameraDriver", [], ctypes.c_char_p)
_SDL_GetCameras = bind("SDL_GetCameras", [ctypes.POINTER(ctypes.c_int)], ctypes.POINTER(_ID))
_SDL_GetCameraSupportedFormats = bind(
    "SDL_GetCameraSupportedFormats", [_ID, ctypes.POINTER(ctypes.c_int)], ctypes.POINTER(_CameraSpecP)
)
_SDL_GetCameraName = bind("SDL_GetCameraName", [_ID], ctypes.c_char_p)
_SDL_GetCameraPosition = bind("SDL_GetCameraPosition", [_ID], ctypes.c_int)
_SDL_OpenCamera = bind("SDL_OpenCamera", [_ID, _CameraSpecP], _CameraP)
_SDL_GetCameraPermissionState = bind("SDL_GetCameraPermissionState", [_CameraP], ctypes.c_int)
_SDL_GetCameraID = bind("SDL_GetCameraID", [_CameraP], _ID)
_SDL_GetCameraProperties = bind("SDL_GetCameraProperties", [_CameraP], ctypes.c_uint32)
_SDL_GetCameraFormat = bind("SDL_GetCameraFormat", [_CameraP, _CameraSpecP], ctypes.c_bool)
_SDL_AcquireCameraFrame = bind("SDL_AcquireCameraFrame", [_CameraP, ctypes.POINTER(ctypes.c_uint64)], _SurfaceP)
_SDL_ReleaseCameraFrame = bind("SDL_ReleaseCameraFrame", [_CameraP, _SurfaceP], None)
_SDL_CloseCamera = bind("SDL_CloseCamera", [_CameraP], None)


def get_drivers() -> list[str]:
    """
    :return: The names of the camera drivers built into SDL, in the order they are tried.
    """
    return [_SDL_GetCameraDriver(i).decode("utf-8") for i in range(_SDL_GetNumCameraDrivers())]


def get_current_driver() -> str | None:
    """
    :return: The name of the current camera driver or None if no driver has been initialized.
    """
    name = _SDL_GetCurrentCameraDriver()
    return None if name is None else name.decode("utf-8")


def get_cameras() -> list[int]:
    """
    :return: The instance ids of the currently connected cameras.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetCameras(ctypes.byref(count)))
    return stdinc.take_array(array, count.value)


def get_supported_formats(camera_id: int) -> list[CameraSpec]:
    """
    Get the native formats a camera supports. The list may be empty if the camera doesn't report them.
    """
    count = ctypes.c_int()
    array = errors.check_null(_SDL_GetCameraSupportedFormats(camera_id, ctypes.byref(count)))
    # The specs live in the same allocation as the array.
    try:
        return [CameraSpec.from_sdl(array[i].contents) for i in range(count.value)]
    finally:
        stdinc.free(ctypes.cast(array, ctypes.c_void_p))


def get_name(camera_id: int) -> str:
    return errors.check_null(_SDL_GetCameraName(camera_id)).decode("utf-8")


def get_position(camera_id: int) -> CameraPosition | None:
    """
    :return: The position of the camera relative to the system, or None if it is unknown.
    """
    position = CameraPosition(_SDL_GetCameraPosition(camera_id))
    return None if position == CameraPosition.UNKNOWN else position


class Camera(AbstractContextManager["Camera"]):
    """
    An opened camera (SDL_Camera).
    """

    __slots__ = ("pointer",)

    def __init__(self, pointer: ctypes._Pointer[_Camera]) -> None:
        self.pointer = pointer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Camera):
            return NotImplemented
        return ctypes.cast(self.pointer, ctypes.c_void_p).value == ctypes.cast(other.pointer, ctypes.c_void_p).value

    def __hash__(self) -> int:
        return hash(ctypes.cast(self.pointer, ctypes.c_void_p).value)

    @classmethod
    def open(cls, camera_id: int, spec: CameraSpec | None = None) -> Self:
        """
        Open a camera.

        :param spec: The desired output format. SDL converts to it if the camera does not support it natively.
                     None uses a format the camera supports.
        """
        desired = None if spec is None else ctypes.byref(spec.to_sdl())
        camera = cls(errors.check_null(_SDL_OpenCamera(camera_id, desired)))
        logger.debug(f"Opened camera {camera_id}.")
        return camera

    def close(self) -> None:
        if not self.pointer:
            return

        pointer = self.pointer
        self.pointer = _CameraP()
        _SDL_CloseCamera(pointer)

    @property
    def permission_state(self) -> PermissionState:
        return PermissionState(_SDL_GetCameraPermissionState(self.pointer))

    @property
    def id(self) -> int:
        return errors.check_id(_SDL_GetCameraID(self.pointer))

    @property
    def properties(self) -> properties.Group:
        return properties.Group(errors.check_id(_SDL_GetCameraProperties(self.pointer)))

    def get_format(self) -> CameraSpec:
        """
        Get the format the camera delivers frames in. Fails while the permission is still pending.
        """
        spec = _CameraSpec()
        errors.check_bool(_SDL_GetCameraFormat(self.pointer, ctypes.byref(spec)))
        return CameraSpec.from_sdl(spec)

    def acquire_frame(self) -> tuple[Surface | None, int | None]:
        """
        Acquire the next frame, if one is available.

        Every acquired frame must be handed back with release_frame().

        :return: The frame and its timestamp in nanoseconds, or (None, None) if no new frame is ready.
        """
        timestamp = ctypes.c_uint64()
        frame = _SDL_AcquireCameraFrame(self.pointer, ctypes.byref(timestamp))
        if not frame:
            return None, None
        return Surface(frame), timestamp.value or None

    def release_frame(self, frame: Surface) -> None:
        """
        Return a frame to the camera. The surface handle is invalid afterwards.
        """
        if not frame.pointer:
            return

        pointer = frame.pointer
        frame.pointer = _SurfaceP()
        _SDL_ReleaseCameraFrame(self.pointer, pointer)

    @contextmanager
    def frame(self) -> Iterator[tuple[Surface | None, int | None]]:
        """
        Acquire a frame for the duration of a block.
        """
        surface, timestamp = self.acquire_frame()
        try:
            yield surface, timestamp
        finally:
            if surface is not None:
                self.release_frame(surface)
