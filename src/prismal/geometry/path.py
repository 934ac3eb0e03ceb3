"""Closed path primitives handed to drawing sinks."""

from __future__ import annotations

__all__ = [
    "CIRCLE_SEGMENTS",
    "CirclePath",
    "ClosedPath",
    "PolygonPath",
    "circle_path",
    "closing_path",
    "regular_polygon_path",
]

import math
from dataclasses import dataclass
from typing import Union

from prismal.errors import InvariantViolationError
from prismal.geometry.polygon import corner_points
from prismal.geometry.vector import Point

CIRCLE_SEGMENTS: int = 64
"""Number of vertices used when a circle is approximated by a polygon."""


@dataclass(frozen=True)
class PolygonPath:
    """A path moving to the first vertex, lining to the rest and closing."""

    points: tuple[Point, ...]

    @property
    def vertices(self) -> list[Point]:
        return list(self.points)

    def commands(self) -> list[tuple]:
        """Path commands in SVG order: ``M``, one ``L`` per successor, ``Z``."""
        first, *rest = self.points
        return (
            [("M", first.x, first.y)]
            + [("L", p.x, p.y) for p in rest]
            + [("Z",)]
        )


@dataclass(frozen=True)
class CirclePath:
    """A full-turn arc around ``center``."""

    center: Point
    radius: float

    @property
    def vertices(self) -> list[Point]:
        """The circle approximated by ``CIRCLE_SEGMENTS`` points."""
        return corner_points(CIRCLE_SEGMENTS, self.center, self.radius)

    def commands(self) -> list[tuple]:
        """``M`` to the rightmost point, one full-turn arc, ``Z``.

        The arc tuple is ``("A", cx, cy, radius, start_angle, end_angle)``
        with angles in radians, not SVG arc syntax.
        """
        start = Point(self.center.x + self.radius, self.center.y)
        return [
            ("M", start.x, start.y),
            ("A", self.center.x, self.center.y, self.radius, 0.0, 2 * math.pi),
            ("Z",),
        ]


ClosedPath = Union[PolygonPath, CirclePath]


def closing_path(points: list[Point]) -> PolygonPath | None:
    """Close a path over ``points``, or return None for fewer than three."""
    if len(points) < 3:
        return None
    return PolygonPath(tuple(points))


def regular_polygon_path(vertex_count: int, center: Point, distance: float) -> PolygonPath:
    """Closed path over the corners of a regular polygon.

    Callers must pass ``vertex_count >= 3`` and a positive distance; anything
    else collapses the corners below three points and raises
    InvariantViolationError.
    """
    path = closing_path(corner_points(vertex_count, center, distance))
    if path is None:
        raise InvariantViolationError(
            f"Regular polygon with {vertex_count} vertices and corner distance "
            f"{distance} has fewer than 3 corners"
        )
    return path


def circle_path(center: Point, radius: float) -> CirclePath:
    return CirclePath(center, radius)
