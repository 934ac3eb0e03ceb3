"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
DEFAULT_WIDTH: int = 800
"""Default SVG width in pixels."""

DEFAULT_HEIGHT: int = 800
"""Default SVG height in pixels."""

DEFAULT_OUTPUT: str = "prismal.svg"
"""Output path used by the CLI when none is given."""

PNG_SCALE: float = 2.0
"""Rasterisation scale for PNG export."""

# ---------------------------------------------------------------------------
# Strokes
# ---------------------------------------------------------------------------
POLYGON_STROKE_WIDTH: float = 1.0
"""Default stroke width of layer polygons."""

STRUCTURE_STROKE_WIDTH: float = 0.75
"""Default stroke width of structure polygons."""
