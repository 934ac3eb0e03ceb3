"""Light theme."""

from prismal.model.color import Color
from prismal.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    structure_stroke=Color(0.0, 0.0, 0.2, 0.8),
    structure_fill=Color(0.0, 0.0, 0.0, 0.05),
    polygon_stroke_width=1.25,
    structure_stroke_width=1.0,
)
