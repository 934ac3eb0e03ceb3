"""prismal: concentric layers of regular polygons, rendered to SVG."""

__version__ = "0.1.0"

from prismal.errors import InvariantViolationError, PrismalError
from prismal.layout.bounds import Rect
from prismal.model import Color, ColorScheme, DrawingOptions, RenderConfig
from prismal.render import (
    RecordingSink,
    compose_drawables,
    render_layers,
    render_svg,
)
from prismal.surface import GeometrySurface

__all__ = [
    "Color",
    "ColorScheme",
    "DrawingOptions",
    "GeometrySurface",
    "InvariantViolationError",
    "PrismalError",
    "RecordingSink",
    "Rect",
    "RenderConfig",
    "__version__",
    "compose_drawables",
    "render_layers",
    "render_svg",
]
