"""Rendering: color resolution, the layered render pass and drawing sinks."""

from prismal.render.colors import resolve_color
from prismal.render.orchestrator import (
    LayerReport,
    RenderReport,
    compose_drawables,
    iter_drawables,
    render_layers,
)
from prismal.render.sink import (
    DrawablePolygon,
    DrawingSink,
    PaintOperation,
    PathRole,
    RecordingSink,
)
from prismal.render.style import DEFAULT_STRUCTURE_STYLE, StructureStyle, Theme
from prismal.render.svg import SvgSink, render_drawing, render_svg

__all__ = [
    "DEFAULT_STRUCTURE_STYLE",
    "DrawablePolygon",
    "DrawingSink",
    "LayerReport",
    "PaintOperation",
    "PathRole",
    "RecordingSink",
    "RenderReport",
    "StructureStyle",
    "SvgSink",
    "Theme",
    "compose_drawables",
    "iter_drawables",
    "render_drawing",
    "render_layers",
    "render_svg",
    "resolve_color",
]
