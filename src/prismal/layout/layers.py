"""Polygon centers for each concentric layer.

Layer ``k`` is anchored on a structure polygon whose corners lie ``k`` radial
steps from the surface center. Every structure edge is split into ``k``
segments, so each corner is followed by ``k - 1`` edge points and deeper
layers carry proportionally more polygons. Layer 0 collapses to the center.
"""

from __future__ import annotations

__all__ = [
    "layer_indices",
    "polygon_centers",
    "polygon_corner_distance",
    "structure_corners",
]

from prismal.geometry.polygon import corner_points
from prismal.geometry.vector import Point, lines_consecutively_connecting
from prismal.layout.bounds import Rect
from prismal.model.config import DrawingOptions, RenderConfig


def polygon_corner_distance(config: RenderConfig, bounds: Rect) -> float:
    """The radial step between layers, also the corner distance of each polygon.

    Safe to use as a multiple up to ``config.layer_count``.
    """
    shorter_half = min(bounds.width, bounds.height) / 2.0
    return config.scale * shorter_half / config.layer_count


def layer_indices(config: RenderConfig) -> list[int]:
    """Layer indices in drawing order: outward, or inward when reversed."""
    indices = list(range(config.layer_count))
    if config.has_option(DrawingOptions.REVERSE_ORDER):
        indices.reverse()
    return indices


def structure_corners(layer_index: int, config: RenderConfig, bounds: Rect) -> list[Point]:
    return corner_points(
        config.structure_vertex_count,
        bounds.center,
        layer_index * polygon_corner_distance(config, bounds),
    )


def polygon_centers(layer_index: int, config: RenderConfig, bounds: Rect) -> list[Point]:
    """Ordered centers of every polygon in the layer.

    Each structure corner comes first, followed by the subdivision points of
    the edge leaving it, going around the structure loop.
    """
    corners = structure_corners(layer_index, config, bounds)
    if len(corners) < 2:
        return corners

    edges = lines_consecutively_connecting(corners)
    centers: list[Point] = []
    for corner, edge in zip(corners, edges):
        centers.append(corner)
        centers.extend(edge.middle_points(layer_index))
    return centers
