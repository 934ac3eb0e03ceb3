"""Layer layout: radial step, structure corners, polygon centers and culling."""

from prismal.layout.bounds import Rect, bounding_square
from prismal.layout.layers import (
    layer_indices,
    polygon_centers,
    polygon_corner_distance,
    structure_corners,
)

__all__ = [
    "Rect",
    "bounding_square",
    "layer_indices",
    "polygon_centers",
    "polygon_corner_distance",
    "structure_corners",
]
