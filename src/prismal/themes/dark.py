"""Dark theme: light structure lines on near-black."""

from prismal.model.color import Color
from prismal.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#111111",
    structure_stroke=Color(0.0, 0.0, 1.0, 0.6),
    structure_fill=Color(0.0, 0.0, 1.0, 0.08),
    polygon_stroke_width=1.0,
    structure_stroke_width=0.75,
)
