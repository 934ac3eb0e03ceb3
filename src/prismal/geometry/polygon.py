"""Corner points of regular polygons."""

from __future__ import annotations

__all__ = ["corner_points"]

import math

from prismal.geometry.vector import Point


def corner_points(vertex_count: int, center: Point, distance: float) -> list[Point]:
    """Return the corners of a regular polygon around ``center``.

    Corner 0 sits at a pure y offset of ``distance`` from the center, the
    rest follow in ascending angle. A non-positive vertex count yields no
    corners; a single vertex or a non-positive distance collapses the polygon
    to its center point.
    """
    if vertex_count <= 0:
        return []
    if vertex_count == 1 or distance <= 0:
        return [center]

    stride = 2 * math.pi / vertex_count
    return [
        Point(
            center.x + distance * math.sin(stride * v),
            center.y + distance * math.cos(stride * v),
        )
        for v in range(vertex_count)
    ]
