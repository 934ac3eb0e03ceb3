"""Axis-aligned rectangles for target surfaces and visibility culling."""

from __future__ import annotations

__all__ = ["Rect", "bounding_square"]

from dataclasses import dataclass

from prismal.geometry.vector import Point


@dataclass(frozen=True)
class Rect:
    """Rectangle with its origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of_size(cls, width: float, height: float) -> Rect:
        return cls(0.0, 0.0, width, height)

    @classmethod
    def from_center(cls, center: Point, width: float, height: float) -> Rect:
        return cls(center.x - width / 2, center.y - height / 2, width, height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with positive area.

        Rectangles that merely share an edge or a corner do not intersect.
        """
        return (
            self.x < other.max_x
            and other.x < self.max_x
            and self.y < other.max_y
            and other.y < self.max_y
        )


def bounding_square(center: Point, side: float) -> Rect:
    """Square of the given side length centered on ``center``."""
    return Rect.from_center(center, side, side)
