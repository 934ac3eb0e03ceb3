"""SVG generation for layered polygon surfaces using drawsvg."""

from __future__ import annotations

__all__ = ["SvgSink", "render_drawing", "render_svg"]

import random

import drawsvg as draw

from prismal.geometry.path import CirclePath, ClosedPath
from prismal.layout.bounds import Rect
from prismal.model.color import Color
from prismal.model.config import RenderConfig
from prismal.render.orchestrator import RenderReport, render_layers
from prismal.render.sink import PathRole
from prismal.render.style import Theme


class SvgSink:
    """Paints closed paths onto a drawsvg Drawing."""

    def __init__(self, d: draw.Drawing, theme: Theme) -> None:
        self.d = d
        self.theme = theme

    def _stroke_width(self, role: PathRole) -> float:
        if role is PathRole.STRUCTURE:
            return self.theme.structure_stroke_width
        return self.theme.polygon_stroke_width

    def stroke_path(self, path: ClosedPath, color: Color, role: PathRole) -> None:
        self.d.append(_shape(
            path,
            fill="none",
            stroke=color.to_hex(),
            stroke_opacity=_fmt(color.opacity),
            stroke_width=self._stroke_width(role),
            stroke_linejoin=self.theme.stroke_linejoin,
        ))

    def fill_path(self, path: ClosedPath, color: Color, role: PathRole) -> None:
        self.d.append(_shape(
            path,
            fill=color.to_hex(),
            fill_opacity=_fmt(color.opacity),
            stroke="none",
        ))


def _fmt(value: float) -> str:
    return f"{value:.4g}"


def _shape(path: ClosedPath, **kwargs) -> draw.DrawingElement:
    """Convert a closed path into a drawsvg element."""
    if isinstance(path, CirclePath):
        return draw.Circle(path.center.x, path.center.y, path.radius, **kwargs)

    p = draw.Path(**kwargs)
    first, *rest = path.vertices
    p.M(first.x, first.y)
    for point in rest:
        p.L(point.x, point.y)
    p.Z()
    return p


def render_drawing(
    config: RenderConfig,
    width: float,
    height: float,
    theme: Theme,
    *,
    rng: random.Random | None = None,
) -> tuple[draw.Drawing, RenderReport]:
    """Render one pass onto a new drawing of the given size."""
    d = draw.Drawing(width, height)

    # Background
    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    report = render_layers(
        config,
        Rect.of_size(width, height),
        SvgSink(d, theme),
        rng=rng,
        structure_style=theme.structure_style,
    )
    return d, report


def render_svg(
    config: RenderConfig,
    width: float,
    height: float,
    theme: Theme,
    *,
    rng: random.Random | None = None,
) -> str:
    """Render a configuration to an SVG string."""
    d, _ = render_drawing(config, width, height, theme, rng=rng)
    return d.as_svg()
