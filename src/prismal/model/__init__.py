"""Data model: colors, color schemes and the render configuration."""

from prismal.model.color import Color, ColorScheme, parse_scheme_pair
from prismal.model.config import DrawingOptions, RenderConfig

__all__ = [
    "Color",
    "ColorScheme",
    "DrawingOptions",
    "RenderConfig",
    "parse_scheme_pair",
]
