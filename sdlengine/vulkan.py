# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Vulkan support functions.

Vulkan handles are passed around as integers, as they are returned by
the Python Vulkan binding of your choice. Windows used with Vulkan must be
created with WindowFlags.VULKAN.
"""

from __future__ import annotations

import ctypes
from contextlib import AbstractContextManager
from os import PathLike, fspath
from types import TracebackType
from typing import Self

from . import errors
from ._dll import bind
from .video import Window, _WindowP

__all__ = [
    "VulkanSurface",
    "get_instance_extensions",
    "get_presentation_support",
    "get_vk_get_instance_proc_addr",
    "load_library",
    "unload_library",
]


_SDL_Vulkan_LoadLibrary = bind("SDL_Vulkan_LoadLibrary", [ctypes.c_char_p], ctypes.c_bool)
_SDL_Vulkan_GetVkGetInstanceProcAddr = bind("SDL_Vulkan_GetVkGetInstanceProcAddr", [], ctypes.c_void_p)
_SDL_Vulkan_UnloadLibrary = bind("SDL_Vulkan_UnloadLibrary", [], None)
_SDL_Vulkan_GetInstanceExtensions = bind(
    "SDL_Vulkan_GetInstanceExtensions", [ctypes.POINTER(ctypes.c_uint32)], ctypes.POINTER(ctypes.c_char_p)
)
_SDL_Vulkan_CreateSurface = bind(
    "SDL_Vulkan_CreateSurface",
    [_WindowP, ctypes.c_void_p, ctypes.c_void_p, ctypes.POINTER(ctypes.c_uint64)],
    ctypes.c_bool,
)
_SDL_Vulkan_DestroySurface = bind(
    "SDL_Vulkan_DestroySurface", [ctypes.c_void_p, ctypes.c_uint64, ctypes.c_void_p], None
)
_SDL_Vulkan_GetPresentationSupport = bind(
    "SDL_Vulkan_GetPresentationSupport", [ctypes.c_void_p, ctypes.c_void_p, ctypes.c_uint32], ctypes.c_bool
)


def load_library(path: str | PathLike[str] | None = None) -> None:
    """
    Dynamically load the Vulkan loader library.

    :param path: The platform dependent loader, or None for the default.
    """
    errors.check_bool(_SDL_Vulkan_LoadLibrary(None if path is None else fspath(path).encode("utf-8")))


def unload_library() -> None:
    _SDL_Vulkan_UnloadLibrary()


def get_vk_get_instance_proc_addr() -> int:
    """
    :return: The address of the vkGetInstanceProcAddr function of the loaded library.
    """
    return errors.check_null(_SDL_Vulkan_GetVkGetInstanceProcAddr())


def get_instance_extensions() -> list[str]:
    """
    :return: The names of the instance extensions needed to create a surface with VulkanSurface.create().
    """
    count = ctypes.c_uint32()
    array = errors.check_null(_SDL_Vulkan_GetInstanceExtensions(ctypes.byref(count)))
    # Owned by SDL.
    return [array[i].decode("utf-8") for i in range(count.value)]


def get_presentation_support(instance: int, physical_device: int, queue_family_index: int) -> bool:
    """
    Query support for presentation via a given physical device and queue family.
    """
    return bool(_SDL_Vulkan_GetPresentationSupport(instance, physical_device, queue_family_index))


class VulkanSurface(AbstractContextManager["VulkanSurface"]):
    """
    A VkSurfaceKHR created for a window.

    :ivar handle: The VkSurfaceKHR handle.
    """

    __slots__ = ("allocator", "handle", "instance")

    def __init__(self, instance: int, handle: int, allocator: int | None = None) -> None:
        self.instance = instance
        self.handle = handle
        self.allocator = allocator

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc: type[BaseException] | None, val: BaseException | None, tb: TracebackType | None) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return f"<VulkanSurface {self.handle:#x}>"

    @classmethod
    def create(cls, window: Window, instance: int, allocator: int | None = None) -> Self:
        """
        Create a Vulkan rendering surface for a window.

        :param instance: The VkInstance the surface belongs to.
        :param allocator: The address of a VkAllocationCallbacks structure, or None.
        """
        surface = ctypes.c_uint64()
        errors.check_bool(_SDL_Vulkan_CreateSurface(window.pointer, instance, allocator, ctypes.byref(surface)))
        return cls(instance, surface.value, allocator)

    def destroy(self) -> None:
        """
        Destroy the surface. Destroying a destroyed surface does nothing.
        """
        if not self.handle:
            return

        handle = self.handle
        self.handle = 0
        _SDL_Vulkan_DestroySurface(self.instance, handle, self.allocator)
