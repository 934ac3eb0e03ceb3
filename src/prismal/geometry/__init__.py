"""Plane geometry: vectors, regular polygon corners and closed paths."""

from prismal.geometry.path import (
    CirclePath,
    ClosedPath,
    PolygonPath,
    circle_path,
    closing_path,
    regular_polygon_path,
)
from prismal.geometry.polygon import corner_points
from prismal.geometry.vector import Line, Point, Vector, lines_consecutively_connecting

__all__ = [
    "CirclePath",
    "ClosedPath",
    "Line",
    "Point",
    "PolygonPath",
    "Vector",
    "circle_path",
    "closing_path",
    "corner_points",
    "lines_consecutively_connecting",
    "regular_polygon_path",
]
