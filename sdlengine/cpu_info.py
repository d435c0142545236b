# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
CPU feature detection.
"""

import ctypes

from ._dll import Function, bind

__all__ = [
    "CACHELINE_SIZE",
    "get_cache_line_size",
    "get_num_logical_cores",
    "get_simd_alignment",
    "get_system_ram",
    "has_altivec",
    "has_arm_simd",
    "has_avx",
    "has_avx2",
    "has_avx512f",
    "has_lasx",
    "has_lsx",
    "has_mmx",
    "has_neon",
    "has_sse",
    "has_sse2",
    "has_sse3",
    "has_sse41",
    "has_sse42",
]


#: A guess for the cacheline size used for padding.
CACHELINE_SIZE = 128

_SDL_GetCPUCacheLineSize = bind("SDL_GetCPUCacheLineSize", [], ctypes.c_int)
_SDL_GetNumLogicalCPUCores = bind("SDL_GetNumLogicalCPUCores", [], ctypes.c_int)
_SDL_GetSIMDAlignment = bind("SDL_GetSIMDAlignment", [], ctypes.c_size_t)
_SDL_GetSystemRAM = bind("SDL_GetSystemRAM", [], ctypes.c_int)


def _feature(name: str) -> Function:
    return bind(name, [], ctypes.c_bool)


_SDL_HasAltiVec = _feature("SDL_HasAltiVec")
_SDL_HasARMSIMD = _feature("SDL_HasARMSIMD")
_SDL_HasAVX = _feature("SDL_HasAVX")
_SDL_HasAVX2 = _feature("SDL_HasAVX2")
_SDL_HasAVX512F = _feature("SDL_HasAVX512F")
_SDL_HasLASX = _feature("SDL_HasLASX")
_SDL_HasLSX = _feature("SDL_HasLSX")
_SDL_HasMMX = _feature("SDL_HasMMX")
_SDL_HasNEON = _feature("SDL_HasNEON")
_SDL_HasSSE = _feature("SDL_HasSSE")
_SDL_HasSSE2 = _feature("SDL_HasSSE2")
_SDL_HasSSE3 = _feature("SDL_HasSSE3")
_SDL_HasSSE41 = _feature("SDL_HasSSE41")
_SDL_HasSSE42 = _feature("SDL_HasSSE42")


def get_cache_line_size() -> int:
    """
    :return: The L1 cache line size in bytes.
    """
    return _SDL_GetCPUCacheLineSize()


def get_num_logical_cores() -> int:
    return _SDL_GetNumLogicalCPUCores()


def get_simd_alignment() -> int:
    """
    :return: The alignment needed for SIMD allocations on this system.
    """
    return _SDL_GetSIMDAlignment()


def get_system_ram() -> int:
    """
    :return: The amount of RAM in MiB.
    """
    return _SDL_GetSystemRAM()


def has_altivec() -> bool:
    return bool(_SDL_HasAltiVec())


def has_arm_simd() -> bool:
    return bool(_SDL_HasARMSIMD())


def has_avx() -> bool:
    return bool(_SDL_HasAVX())


def has_avx2() -> bool:
    return bool(_SDL_HasAVX2())


def has_avx512f() -> bool:
    return bool(_SDL_HasAVX512F())


def has_lasx() -> bool:
    """
    LoongArch extensions.
    """
    return bool(_SDL_HasLASX())


def has_lsx() -> bool:
    return bool(_SDL_HasLSX())


def has_mmx() -> bool:
    return bool(_SDL_HasMMX())


def has_neon() -> bool:
    return bool(_SDL_HasNEON())


def has_sse() -> bool:
    return bool(_SDL_HasSSE())


def has_sse2() -> bool:
    return bool(_SDL_HasSSE2())


def has_sse3() -> bool:
    return bool(_SDL_HasSSE3())


def has_sse41() -> bool:
    return bool(_SDL_HasSSE41())


def has_sse42() -> bool:
    return bool(_SDL_HasSSE42())
