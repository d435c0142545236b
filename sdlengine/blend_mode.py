# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Blend modes decide how two colors combine when drawing.
"""

import ctypes
from enum import IntEnum

from . import errors
from ._dll import bind

__all__ = ["BlendFactor", "BlendMode", "BlendOperation", "compose_custom", "to_blend_mode"]


class BlendMode(IntEnum):
    #: dstRGBA = srcRGBA
    NONE = 0x00000000
    #: dstRGB = (srcRGB * srcA) + (dstRGB * (1-srcA)), dstA = srcA + (dstA * (1-srcA))
    BLEND = 0x00000001
    #: dstRGBA = srcRGBA + (dstRGBA * (1-srcA))
    BLEND_PREMULTIPLIED = 0x00000010
    #: dstRGB = (srcRGB * srcA) + dstRGB, dstA = dstA
    ADD = 0x00000002
    #: dstRGB = srcRGB + dstRGB, dstA = dstA
    ADD_PREMULTIPLIED = 0x00000020
    #: dstRGB = srcRGB * dstRGB, dstA = dstA
    MOD = 0x00000004
    #: dstRGB = (srcRGB * dstRGB) + (dstRGB * (1-srcA)), dstA = dstA
    MUL = 0x00000008
    INVALID = 0x7FFFFFFF


class BlendOperation(IntEnum):
    ADD = 0x1
    SUBTRACT = 0x2
    REV_SUBTRACT = 0x3
    MINIMUM = 0x4
    MAXIMUM = 0x5


class BlendFactor(IntEnum):
    ZERO = 0x1
    ONE = 0x2
    SRC_COLOR = 0x3
    ONE_MINUS_SRC_COLOR = 0x4
    SRC_ALPHA = 0x5
    ONE_MINUS_SRC_ALPHA = 0x6
    DST_COLOR = 0x7
    ONE_MINUS_DST_COLOR = 0x8
    DST_ALPHA = 0x9
    ONE_MINUS_DST_ALPHA = 0xA


_SDL_ComposeCustomBlendMode = bind("SDL_ComposeCustomBlendMode", [ctypes.c_int] * 6, ctypes.c_uint32)


def to_blend_mode(value: int) -> BlendMode | int:
    """
    :return: The matching BlendMode, or the raw value for custom blend modes.
    """
    try:
        return BlendMode(value)
    except ValueError:
        return value


def compose_custom(
    src_color_factor: BlendFactor,
    dst_color_factor: BlendFactor,
    color_operation: BlendOperation,
    src_alpha_factor: BlendFactor,
    dst_alpha_factor: BlendFactor,
    alpha_operation: BlendOperation,
) -> int:
    """
    Compose a custom blend mode for renderers.

    :return: A value usable wherever a blend mode is accepted.
    """
    mode = _SDL_ComposeCustomBlendMode(
        src_color_factor,
        dst_color_factor,
        color_operation,
        src_alpha_factor,
        dst_alpha_factor,
        alpha_operation,
    )
    return errors.check(mode, BlendMode.INVALID)
