"""Tests for closed path construction."""

from __future__ import annotations

import math

import pytest

from prismal.errors import InvariantViolationError
from prismal.geometry.path import (
    CIRCLE_SEGMENTS,
    CirclePath,
    PolygonPath,
    circle_path,
    closing_path,
    regular_polygon_path,
)
from prismal.geometry.vector import Point

TRIANGLE = [Point(0.0, 0.0), Point(4.0, 0.0), Point(2.0, 3.0)]


class TestClosingPath:
    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_fewer_than_three_points(self, n: int):
        assert closing_path(TRIANGLE[:n]) is None

    def test_vertices_read_back(self):
        path = closing_path(TRIANGLE)
        assert isinstance(path, PolygonPath)
        assert path.vertices == TRIANGLE

    def test_commands_close_back_to_start(self):
        path = closing_path(TRIANGLE)
        assert path.commands() == [
            ("M", 0.0, 0.0),
            ("L", 4.0, 0.0),
            ("L", 2.0, 3.0),
            ("Z",),
        ]


class TestRegularPolygonPath:
    def test_triangle(self):
        path = regular_polygon_path(3, Point(0.0, 0.0), 2.0)
        assert len(path.vertices) == 3
        assert path.vertices[0] == Point(0.0, 2.0)

    def test_zero_distance_is_an_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            regular_polygon_path(3, Point(0.0, 0.0), 0.0)

    def test_too_few_vertices_is_an_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            regular_polygon_path(2, Point(0.0, 0.0), 5.0)


class TestCirclePath:
    def test_full_turn(self):
        path = circle_path(Point(1.0, 1.0), 3.0)
        assert isinstance(path, CirclePath)
        move, arc, close = path.commands()
        assert move == ("M", 4.0, 1.0)
        assert arc[:5] == ("A", 1.0, 1.0, 3.0, 0.0)
        assert arc[-1] == pytest.approx(2 * math.pi)
        assert close == ("Z",)

    def test_vertices_lie_on_circle(self):
        path = circle_path(Point(1.0, 1.0), 3.0)
        assert len(path.vertices) == CIRCLE_SEGMENTS
        for p in path.vertices:
            assert math.hypot(p.x - 1.0, p.y - 1.0) == pytest.approx(3.0)
