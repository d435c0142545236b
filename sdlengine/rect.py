# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""
Points and rectangles.

The classes of this module have the exact memory layout of their SDL
counterparts and can be passed to native functions by reference.

The helpers that SDL implements as inline functions in its header
(is_empty, equals, contains_point) are implemented in Python, the others
call into SDL.
"""

from __future__ import annotations

import ctypes
from collections.abc import Iterator, Sequence

from . import errors
from ._dll import bind

__all__ = [
    "FLT_EPSILON",
    "FPoint",
    "FRect",
    "Point",
    "Rect",
    "get_enclosing_points",
    "get_intersection",
    "get_line_intersection",
    "get_union",
    "has_intersection",
]


#: Epsilon used for comparing floating point rectangles.
FLT_EPSILON = 1.1920928955078125e-07


class Point(ctypes.Structure):
    """
    A point with integer coordinates (SDL_Point).
    """

    _fields_ = [("x", ctypes.c_int), ("y", ctypes.c_int)]

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_float(self) -> FPoint:
        return FPoint(self.x, self.y)


class FPoint(ctypes.Structure):
    """
    A point with floating point coordinates (SDL_FPoint).
    """

    _fields_ = [("x", ctypes.c_float), ("y", ctypes.c_float)]

    def __repr__(self) -> str:
        return f"FPoint({self.x}, {self.y})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FPoint):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_int(self) -> Point:
        """
        Truncates the coordinates towards zero.
        """
        return Point(int(self.x), int(self.y))


class Rect(ctypes.Structure):
    """
    A rectangle with the origin at the upper left, with integer coordinates (SDL_Rect).
    """

    _fields_ = [("x", ctypes.c_int), ("y", ctypes.c_int), ("w", ctypes.c_int), ("h", ctypes.c_int)]

    def __repr__(self) -> str:
        return f"Rect({self.x}, {self.y}, {self.w}, {self.h})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.equals(other)

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.w, self.h)

    def is_empty(self) -> bool:
        """
        A rectangle is empty if it has no area.
        """
        return self.w <= 0 or self.h <= 0

    def equals(self, other: Rect) -> bool:
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def contains_point(self, point: Point) -> bool:
        """
        Points on the right and bottom edges are outside of the rectangle.
        """
        return self.x <= point.x < self.x + self.w and self.y <= point.y < self.y + self.h

    def to_float(self) -> FRect:
        return FRect(self.x, self.y, self.w, self.h)


class FRect(ctypes.Structure):
    """
    A rectangle with the origin at the upper left, with floating point coordinates (SDL_FRect).
    """

    _fields_ = [("x", ctypes.c_float), ("y", ctypes.c_float), ("w", ctypes.c_float), ("h", ctypes.c_float)]

    def __repr__(self) -> str:
        return f"FRect({self.x}, {self.y}, {self.w}, {self.h})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FRect):
            return NotImplemented
        return self.equals(other, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.w, self.h)

    def is_empty(self) -> bool:
        """
        Unlike integer rectangles, a floating point rectangle with a width or height of zero is not empty.
        """
        return self.w < 0 or self.h < 0

    def equals(self, other: FRect, epsilon: float = FLT_EPSILON) -> bool:
        """
        Rectangles are considered equal if each of their x, y, width and height are within epsilon.
        """
        if self is other:
            return True
        return all(
            abs(a - b) <= epsilon
            for a, b in zip((self.x, self.y, self.w, self.h), (other.x, other.y, other.w, other.h))
        )

    def contains_point(self, point: FPoint) -> bool:
        """
        Points on the edges are inside of the rectangle.
        """
        return self.x <= point.x <= self.x + self.w and self.y <= point.y <= self.y + self.h

    def to_int(self) -> Rect:
        return Rect(int(self.x), int(self.y), int(self.w), int(self.h))


_RectP = ctypes.POINTER(Rect)
_FRectP = ctypes.POINTER(FRect)
_IntP = ctypes.POINTER(ctypes.c_int)
_FloatP = ctypes.POINTER(ctypes.c_float)

_SDL_HasRectIntersection = bind("SDL_HasRectIntersection", [_RectP, _RectP], ctypes.c_bool)
_SDL_GetRectIntersection = bind("SDL_GetRectIntersection", [_RectP, _RectP, _RectP], ctypes.c_bool)
_SDL_GetRectUnion = bind("SDL_GetRectUnion", [_RectP, _RectP, _RectP], ctypes.c_bool)
_SDL_GetRectEnclosingPoints = bind(
    "SDL_GetRectEnclosingPoints", [ctypes.POINTER(Point), ctypes.c_int, _RectP, _RectP], ctypes.c_bool
)
_SDL_GetRectAndLineIntersection = bind(
    "SDL_GetRectAndLineIntersection", [_RectP, _IntP, _IntP, _IntP, _IntP], ctypes.c_bool
)
_SDL_HasRectIntersectionFloat = bind("SDL_HasRectIntersectionFloat", [_FRectP, _FRectP], ctypes.c_bool)
_SDL_GetRectIntersectionFloat = bind("SDL_GetRectIntersectionFloat", [_FRectP, _FRectP, _FRectP], ctypes.c_bool)
_SDL_GetRectUnionFloat = bind("SDL_GetRectUnionFloat", [_FRectP, _FRectP, _FRectP], ctypes.c_bool)
_SDL_GetRectEnclosingPointsFloat = bind(
    "SDL_GetRectEnclosingPointsFloat", [ctypes.POINTER(FPoint), ctypes.c_int, _FRectP, _FRectP], ctypes.c_bool
)
_SDL_GetRectAndLineIntersectionFloat = bind(
    "SDL_GetRectAndLineIntersectionFloat", [_FRectP, _FloatP, _FloatP, _FloatP, _FloatP], ctypes.c_bool
)


def _check_same_kind(a: Rect | FRect, b: Rect | FRect) -> bool:
    if type(a) is not type(b):
        raise TypeError(f"Cannot mix {type(a).__name__} and {type(b).__name__}")
    return isinstance(a, FRect)


def has_intersection(a: Rect | FRect, b: Rect | FRect) -> bool:
    """
    Determine whether two rectangles intersect.
    """
    if _check_same_kind(a, b):
        return bool(_SDL_HasRectIntersectionFloat(ctypes.byref(a), ctypes.byref(b)))
    return bool(_SDL_HasRectIntersection(ctypes.byref(a), ctypes.byref(b)))


def get_intersection[R: (Rect, FRect)](a: R, b: R) -> R | None:
    """
    Calculate the intersection of two rectangles.

    :return: The intersection or None if the rectangles do not intersect.
    """
    result = type(a)()
    if _check_same_kind(a, b):
        found = _SDL_GetRectIntersectionFloat(ctypes.byref(a), ctypes.byref(b), ctypes.byref(result))
    else:
        found = _SDL_GetRectIntersection(ctypes.byref(a), ctypes.byref(b), ctypes.byref(result))
    return result if found else None


def get_union[R: (Rect, FRect)](a: R, b: R) -> R:
    """
    Calculate the union of two rectangles.
    """
    result = type(a)()
    if _check_same_kind(a, b):
        ok = _SDL_GetRectUnionFloat(ctypes.byref(a), ctypes.byref(b), ctypes.byref(result))
    else:
        ok = _SDL_GetRectUnion(ctypes.byref(a), ctypes.byref(b), ctypes.byref(result))
    errors.check_bool(ok)
    return result


def get_enclosing_points(
    points: Sequence[Point] | Sequence[FPoint], clip: Rect | FRect | None = None
) -> Rect | FRect | None:
    """
    Calculate a minimal rectangle enclosing a set of points.

    :param clip: Only points inside of this rectangle are considered.
    :return: The enclosing rectangle, or None if all points were outside the clipping rectangle.
    """
    if not points:
        return None

    is_float = isinstance(points[0], FPoint)
    point_type, rect_type = (FPoint, FRect) if is_float else (Point, Rect)
    if clip is not None and not isinstance(clip, rect_type):
        raise TypeError(f"Clip must be a {rect_type.__name__}")

    array = (point_type * len(points))(*points)
    result = rect_type()
    clip_ref = None if clip is None else ctypes.byref(clip)
    func = _SDL_GetRectEnclosingPointsFloat if is_float else _SDL_GetRectEnclosingPoints
    if not func(array, len(points), clip_ref, ctypes.byref(result)):
        return None
    return result


def get_line_intersection(
    rect: Rect | FRect, x1: float, y1: float, x2: float, y2: float
) -> tuple[float, float, float, float] | None:
    """
    Calculate the intersection of a rectangle and line segment.

    :return: The clipped line segment or None if the line does not intersect the rectangle.
    """
    if isinstance(rect, FRect):
        coords = [ctypes.c_float(v) for v in (x1, y1, x2, y2)]
        found = _SDL_GetRectAndLineIntersectionFloat(ctypes.byref(rect), *map(ctypes.byref, coords))
    else:
        coords = [ctypes.c_int(int(v)) for v in (x1, y1, x2, y2)]  # type: ignore[misc]
        found = _SDL_GetRectAndLineIntersection(ctypes.byref(rect), *map(ctypes.byref, coords))

    if not found:
        return None
    return coords[0].value, coords[1].value, coords[2].value, coords[3].value
