"""Tests for the layer layout: radial step, structure corners and centers."""

from __future__ import annotations

import pytest

from prismal.geometry.vector import Point
from prismal.layout.bounds import Rect, bounding_square
from prismal.layout.layers import (
    layer_indices,
    polygon_centers,
    polygon_corner_distance,
    structure_corners,
)
from prismal.model.config import DrawingOptions, RenderConfig

BOUNDS = Rect.of_size(200.0, 100.0)


def test_corner_distance_uses_shorter_edge():
    config = RenderConfig(layer_count=2, scale=1.0)
    assert polygon_corner_distance(config, BOUNDS) == pytest.approx(25.0)


def test_corner_distance_scales():
    config = RenderConfig(layer_count=2, scale=3.0)
    assert polygon_corner_distance(config, BOUNDS) == pytest.approx(75.0)


def test_layer_indices_ascending():
    assert layer_indices(RenderConfig(layer_count=4)) == [0, 1, 2, 3]


def test_layer_indices_reversed():
    config = RenderConfig(layer_count=4, drawing_options=DrawingOptions.REVERSE_ORDER)
    assert layer_indices(config) == [3, 2, 1, 0]


def test_layer_zero_is_the_center():
    config = RenderConfig(layer_count=3, structure_vertex_count=5)
    assert structure_corners(0, config, BOUNDS) == [Point(100.0, 50.0)]
    assert polygon_centers(0, config, BOUNDS) == [Point(100.0, 50.0)]


def test_layer_one_is_structure_corners():
    config = RenderConfig(layer_count=3, structure_vertex_count=3)
    corners = structure_corners(1, config, BOUNDS)
    assert len(corners) == 3
    assert polygon_centers(1, config, BOUNDS) == corners


def test_corners_followed_by_edge_points():
    config = RenderConfig(layer_count=2, structure_vertex_count=4)
    corners = structure_corners(2, config, BOUNDS)
    centers = polygon_centers(2, config, BOUNDS)
    assert len(centers) == 8
    assert centers[0::2] == corners
    for i, corner in enumerate(corners):
        nxt = corners[(i + 1) % len(corners)]
        mid = centers[2 * i + 1]
        assert mid.x == pytest.approx((corner.x + nxt.x) / 2)
        assert mid.y == pytest.approx((corner.y + nxt.y) / 2)


@pytest.mark.parametrize("structure_vertices", [3, 4, 6])
@pytest.mark.parametrize("layer", [1, 2, 3, 5])
def test_center_count_grows_with_layer(structure_vertices: int, layer: int):
    config = RenderConfig(layer_count=6, structure_vertex_count=structure_vertices)
    centers = polygon_centers(layer, config, BOUNDS)
    assert len(centers) == structure_vertices * layer


def test_structure_corner_distance():
    config = RenderConfig(layer_count=4, structure_vertex_count=6)
    step = polygon_corner_distance(config, BOUNDS)
    center = BOUNDS.center
    for p in structure_corners(3, config, BOUNDS):
        assert ((p.x - center.x) ** 2 + (p.y - center.y) ** 2) ** 0.5 == pytest.approx(3 * step)


# ---------------------------------------------------------------------------
# Rect
# ---------------------------------------------------------------------------


class TestRect:
    def test_center(self):
        assert Rect(10.0, 20.0, 40.0, 60.0).center == Point(30.0, 50.0)

    def test_from_center(self):
        assert Rect.from_center(Point(5.0, 5.0), 4.0, 2.0) == Rect(3.0, 4.0, 4.0, 2.0)

    def test_overlap(self):
        assert Rect(0.0, 0.0, 10.0, 10.0).intersects(Rect(5.0, 5.0, 10.0, 10.0))

    def test_containment(self):
        assert Rect(0.0, 0.0, 10.0, 10.0).intersects(Rect(2.0, 2.0, 1.0, 1.0))

    def test_separate(self):
        assert not Rect(0.0, 0.0, 10.0, 10.0).intersects(Rect(20.0, 0.0, 5.0, 5.0))

    def test_shared_edge_does_not_intersect(self):
        assert not Rect(0.0, 0.0, 10.0, 10.0).intersects(Rect(10.0, 0.0, 5.0, 5.0))

    def test_bounding_square(self):
        square = bounding_square(Point(10.0, 10.0), 4.0)
        assert square == Rect(8.0, 8.0, 4.0, 4.0)
