"""Points, vectors and lines in the drawing plane."""

from __future__ import annotations

__all__ = ["Line", "Point", "Vector", "lines_consecutively_connecting"]

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position in the drawing plane."""

    x: float
    y: float

    def __add__(self, vector: Vector) -> Point:
        if not isinstance(vector, Vector):
            return NotImplemented
        return Point(self.x + vector.dx, self.y + vector.dy)


@dataclass(frozen=True)
class Vector:
    """A displacement in the drawing plane."""

    dx: float
    dy: float

    @classmethod
    def between(cls, start: Point, end: Point) -> Vector:
        """Displacement leading from ``start`` to ``end``."""
        return cls(end.x - start.x, end.y - start.y)

    def __rmul__(self, multiplier: float) -> Vector:
        return Vector(multiplier * self.dx, multiplier * self.dy)


@dataclass(frozen=True)
class Line:
    """A line segment given by its start point and the vector to its end.

    The end point is always derived from ``start + vector``.
    """

    start: Point
    vector: Vector

    @classmethod
    def between(cls, start: Point, end: Point) -> Line:
        return cls(start, Vector.between(start, end))

    @property
    def end(self) -> Point:
        return self.start + self.vector

    def middle_points(self, segments: int) -> list[Point]:
        """Points splitting the line into ``segments`` equal pieces.

        Start and end are excluded, so ``segments - 1`` points are returned.
        Fewer than two segments yield no points.
        """
        if segments < 2:
            return []
        return [
            self.start + (i / segments) * self.vector
            for i in range(1, segments)
        ]


def lines_consecutively_connecting(points: list[Point]) -> list[Line]:
    """Connect the points in order, closing the loop back to the first one.

    Two points give a single line and fewer than two give none.
    """
    if len(points) < 2:
        return []
    if len(points) == 2:
        return [Line.between(points[0], points[1])]

    shifted = points[1:] + points[:1]
    return [Line.between(a, b) for a, b in zip(points, shifted)]
