"""Render pass: walk the layers, cull, resolve colors and emit drawables.

Layers are visited outward from the center, or inward when
``REVERSE_ORDER`` is set. Walking outward, a layer that draws nothing means
the pattern has left the target rectangle and the pass stops there. Walking
inward the rule is waived and every layer is attempted, since an empty outer
layer says nothing about the inner ones.
"""

from __future__ import annotations

__all__ = [
    "LayerReport",
    "RenderReport",
    "compose_drawables",
    "iter_drawables",
    "render_layers",
]

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator

from prismal.geometry.path import ClosedPath, circle_path, closing_path, regular_polygon_path
from prismal.geometry.vector import Point
from prismal.layout.bounds import Rect, bounding_square
from prismal.layout.layers import (
    layer_indices,
    polygon_centers,
    polygon_corner_distance,
    structure_corners,
)
from prismal.model.color import Color
from prismal.model.config import DrawingOptions, RenderConfig
from prismal.render.colors import resolve_color
from prismal.render.sink import DrawablePolygon, DrawingSink, PathRole
from prismal.render.style import DEFAULT_STRUCTURE_STYLE, StructureStyle

logger = logging.getLogger(__name__)


@dataclass
class LayerReport:
    """Outcome of one attempted layer."""

    index: int
    centers: int = 0
    drawn: int = 0
    culled: int = 0
    structure_drawn: bool = False


@dataclass
class RenderReport:
    """Summary of a render pass."""

    layers: list[LayerReport] = field(default_factory=list)
    terminated_early: bool = False

    @property
    def attempted(self) -> list[int]:
        return [layer.index for layer in self.layers]

    @property
    def polygons_drawn(self) -> int:
        return sum(layer.drawn for layer in self.layers)


def _polygon_path(config: RenderConfig, center: Point, distance: float) -> ClosedPath:
    if config.has_option(DrawingOptions.REPLACE_WITH_CIRCLES):
        return circle_path(center, distance)
    return regular_polygon_path(config.polygon_vertex_count, center, distance)


def _draw_layer(
    layer_index: int,
    centers: list[Point],
    config: RenderConfig,
    bounds: Rect,
    rng: random.Random,
    layer: LayerReport,
) -> Iterator[DrawablePolygon]:
    distance = polygon_corner_distance(config, bounds)
    layer_stroke = resolve_color(config.stroke_color_scheme, layer_index, config.layer_count)
    layer_fill = resolve_color(config.fill_color_scheme, layer_index, config.layer_count)
    stroke = config.has_option(DrawingOptions.STROKE_POLYGONS)
    fill = config.has_option(DrawingOptions.FILL_POLYGONS)

    for center in centers:
        if not bounding_square(center, distance).intersects(bounds):
            layer.culled += 1
            continue

        # Random colors are drawn stroke first, then fill, for every polygon.
        stroke_color = layer_stroke if layer_stroke is not None else Color.random(rng)
        fill_color = layer_fill if layer_fill is not None else Color.random(rng)

        layer.drawn += 1
        yield DrawablePolygon(
            path=_polygon_path(config, center, distance),
            stroke_color=stroke_color,
            fill_color=fill_color,
            stroke=stroke,
            fill=fill,
            layer_index=layer_index,
        )


def _structure_drawable(
    layer_index: int,
    corners: list[Point],
    config: RenderConfig,
    style: StructureStyle,
) -> DrawablePolygon | None:
    stroke = config.has_option(DrawingOptions.STROKE_STRUCTURE)
    fill = config.has_option(DrawingOptions.FILL_STRUCTURE)
    if not (stroke or fill):
        return None

    path = closing_path(corners)
    if path is None:
        # Layer 0 has a single-point structure
        return None
    return DrawablePolygon(
        path=path,
        stroke_color=style.stroke,
        fill_color=style.fill,
        stroke=stroke,
        fill=fill,
        layer_index=layer_index,
        role=PathRole.STRUCTURE,
    )


def iter_drawables(
    config: RenderConfig,
    bounds: Rect,
    *,
    rng: random.Random | None = None,
    structure_style: StructureStyle = DEFAULT_STRUCTURE_STYLE,
    report: RenderReport | None = None,
) -> Iterator[DrawablePolygon]:
    """Yield every drawable of a render pass in painting order.

    If ``report`` is given it is filled in as layers are processed.
    """
    if rng is None:
        rng = random.Random()
    if report is None:
        report = RenderReport()
    reverse = config.has_option(DrawingOptions.REVERSE_ORDER)

    previous_layer_drawn = True
    for layer_index in layer_indices(config):
        if not (previous_layer_drawn or reverse):
            report.terminated_early = True
            logger.info(
                "Layer %d drew nothing, stopping before layer %d",
                layer_index - 1, layer_index,
            )
            return

        layer = LayerReport(index=layer_index)
        report.layers.append(layer)

        corners = structure_corners(layer_index, config, bounds)
        centers = polygon_centers(layer_index, config, bounds)
        layer.centers = len(centers)

        yield from _draw_layer(layer_index, centers, config, bounds, rng, layer)
        previous_layer_drawn = layer.drawn > 0

        structure = _structure_drawable(layer_index, corners, config, structure_style)
        if structure is not None:
            layer.structure_drawn = True
            yield structure

        logger.debug(
            "Layer %d: %d centers, %d drawn, %d culled",
            layer_index, layer.centers, layer.drawn, layer.culled,
        )


def compose_drawables(
    config: RenderConfig,
    bounds: Rect,
    *,
    rng: random.Random | None = None,
    structure_style: StructureStyle = DEFAULT_STRUCTURE_STYLE,
) -> list[DrawablePolygon]:
    """Ordered list of every drawable of a render pass."""
    return list(iter_drawables(config, bounds, rng=rng, structure_style=structure_style))


def render_layers(
    config: RenderConfig,
    bounds: Rect,
    sink: DrawingSink,
    *,
    rng: random.Random | None = None,
    structure_style: StructureStyle = DEFAULT_STRUCTURE_STYLE,
) -> RenderReport:
    """Run a render pass and paint each drawable onto ``sink`` in order."""
    report = RenderReport()
    for drawable in iter_drawables(
        config, bounds, rng=rng, structure_style=structure_style, report=report
    ):
        drawable.paint(sink)
    return report
