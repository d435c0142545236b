# sdl-engine
# Copyright (C) 2022  cid-chan
# Copyright (C) 2025  Jaded-Encoding-Thaumaturgy
# This project is licensed under the EUPL-1.2
# SPDX-License-Identifier: EUPL-1.2
"""Tests for the rect module."""

import pytest

from sdlengine import rect
from sdlengine._testutils import requires_library
from sdlengine.rect import FPoint, FRect, Point, Rect


class TestPoint:
    def test_conversions(self) -> None:
        assert Point(1, 2).to_float() == FPoint(1.0, 2.0)
        assert FPoint(1.9, -1.9).to_int() == Point(1, -1)

    def test_iter(self) -> None:
        assert tuple(Point(3, 4)) == (3, 4)


class TestRect:
    def test_is_empty(self) -> None:
        assert Rect(0, 0, 0, 10).is_empty()
        assert Rect(0, 0, 10, -1).is_empty()
        assert not Rect(0, 0, 1, 1).is_empty()

    def test_equals(self) -> None:
        assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
        assert Rect(1, 2, 3, 4) != Rect(1, 2, 3, 5)

    def test_contains_point_excludes_far_edges(self) -> None:
        r = Rect(0, 0, 10, 10)
        assert r.contains_point(Point(0, 0))
        assert r.contains_point(Point(9, 9))
        assert not r.contains_point(Point(10, 5))
        assert not r.contains_point(Point(5, 10))

    def test_to_float(self) -> None:
        assert Rect(1, 2, 3, 4).to_float() == FRect(1.0, 2.0, 3.0, 4.0)


class TestFRect:
    def test_zero_size_is_not_empty(self) -> None:
        assert not FRect(0, 0, 0, 0).is_empty()
        assert FRect(0, 0, -1, 0).is_empty()

    def test_equals_uses_epsilon(self) -> None:
        a = FRect(0.0, 0.0, 1.0, 1.0)
        b = FRect(0.0, 0.0, 1.0 + rect.FLT_EPSILON / 2, 1.0)
        assert a.equals(b)
        assert a.equals(FRect(0.0, 0.0, 1.05, 1.0), epsilon=0.1)
        assert not a.equals(FRect(0.0, 0.0, 2.0, 1.0))

    def test_contains_point_includes_edges(self) -> None:
        r = FRect(0, 0, 10, 10)
        assert r.contains_point(FPoint(10, 10))
        assert not r.contains_point(FPoint(10.5, 5))

    def test_to_int(self) -> None:
        assert FRect(1.5, 2.5, 3.5, 4.5).to_int() == Rect(1, 2, 3, 4)


class TestMixing:
    def test_mixing_kinds_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            rect.has_intersection(Rect(0, 0, 1, 1), FRect(0, 0, 1, 1))

    def test_enclosing_points_of_nothing(self) -> None:
        assert rect.get_enclosing_points([]) is None

    def test_enclosing_points_clip_kind(self) -> None:
        with pytest.raises(TypeError):
            rect.get_enclosing_points([Point(0, 0)], FRect(0, 0, 1, 1))


@requires_library
class TestNativeRect:
    def test_intersection(self) -> None:
        a, b = Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)
        assert rect.has_intersection(a, b)
        assert rect.get_intersection(a, b) == Rect(5, 5, 5, 5)
        assert rect.get_intersection(a, Rect(20, 20, 1, 1)) is None

    def test_float_intersection(self) -> None:
        a, b = FRect(0, 0, 10, 10), FRect(5, 5, 10, 10)
        assert rect.has_intersection(a, b)
        assert rect.get_intersection(a, b) == FRect(5, 5, 5, 5)

    def test_union(self) -> None:
        assert rect.get_union(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)) == Rect(0, 0, 15, 15)

    def test_enclosing_points(self) -> None:
        assert rect.get_enclosing_points([Point(1, 1), Point(4, 6)]) == Rect(1, 1, 4, 6)

    def test_enclosing_points_outside_clip(self) -> None:
        assert rect.get_enclosing_points([Point(50, 50)], Rect(0, 0, 10, 10)) is None

    def test_line_intersection(self) -> None:
        assert rect.get_line_intersection(Rect(0, 0, 10, 10), -5, 5, 15, 5) == (0, 5, 9, 5)
        assert rect.get_line_intersection(Rect(0, 0, 10, 10), -5, 20, 15, 20) is None
