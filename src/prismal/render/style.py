"""Theme and style definitions for rendering."""

from __future__ import annotations

from dataclasses import dataclass

from prismal.model.color import Color
from prismal.render.constants import POLYGON_STROKE_WIDTH, STRUCTURE_STROKE_WIDTH


@dataclass(frozen=True)
class StructureStyle:
    """Colors used to fill and stroke a layer's structure polygon."""

    stroke: Color
    fill: Color


DEFAULT_STRUCTURE_STYLE = StructureStyle(
    stroke=Color(0.0, 0.0, 1.0, 0.6),
    fill=Color(0.0, 0.0, 1.0, 0.08),
)


@dataclass
class Theme:
    """Visual theme for a rendered surface."""

    name: str
    background_color: str
    structure_stroke: Color
    structure_fill: Color
    polygon_stroke_width: float = POLYGON_STROKE_WIDTH
    structure_stroke_width: float = STRUCTURE_STROKE_WIDTH
    stroke_linejoin: str = "round"

    @property
    def structure_style(self) -> StructureStyle:
        return StructureStyle(stroke=self.structure_stroke, fill=self.structure_fill)
