"""Render configuration: layer count, scale, vertex counts, options, schemes.

Every setter clamps its value and then notifies subscribers, so an owner can
schedule exactly one redraw per change without the configuration knowing how
drawing happens.
"""

from __future__ import annotations

__all__ = [
    "ConfigListener",
    "DrawingOptions",
    "RenderConfig",
]

from enum import Flag, auto
from typing import Callable, Iterable

from prismal.model.color import ColorScheme

MIN_LAYER_COUNT: int = 1
"""Fewest layers a configuration may hold."""

MIN_SCALE: float = 0.001
"""Floor for the scale factor so the radial step never reaches zero."""

MIN_VERTEX_COUNT: int = 3
"""Fewest vertices of a structure or polygon."""

DEFAULT_LAYER_COUNT: int = 1
DEFAULT_SCALE: float = 1.0
DEFAULT_VERTEX_COUNT: int = 3


class DrawingOptions(Flag):
    """Orthogonal drawing flags; any combination is valid."""

    NONE = 0
    REVERSE_ORDER = auto()
    STROKE_POLYGONS = auto()
    STROKE_STRUCTURE = auto()
    FILL_POLYGONS = auto()
    FILL_STRUCTURE = auto()
    REPLACE_WITH_CIRCLES = auto()

    @classmethod
    def parse(cls, names: Iterable[str]) -> DrawingOptions:
        """Combine option names such as ``stroke-polygons`` or ``FILL_STRUCTURE``."""
        options = cls.NONE
        for name in names:
            key = name.strip().upper().replace("-", "_")
            try:
                options |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown drawing option: {name!r}") from None
        return options

    @classmethod
    def names(cls) -> list[str]:
        return [m.name.lower().replace("_", "-") for m in cls if m is not cls.NONE]


DEFAULT_DRAWING_OPTIONS = DrawingOptions.STROKE_POLYGONS

ConfigListener = Callable[["RenderConfig", str], None]


class RenderConfig:
    """Mutable render parameters with clamping setters."""

    def __init__(
        self,
        layer_count: int = DEFAULT_LAYER_COUNT,
        scale: float = DEFAULT_SCALE,
        structure_vertex_count: int = DEFAULT_VERTEX_COUNT,
        polygon_vertex_count: int = DEFAULT_VERTEX_COUNT,
        drawing_options: DrawingOptions = DEFAULT_DRAWING_OPTIONS,
        stroke_color_scheme: ColorScheme | None = None,
        fill_color_scheme: ColorScheme | None = None,
    ) -> None:
        self._listeners: list[ConfigListener] = []
        self._layer_count = max(MIN_LAYER_COUNT, int(layer_count))
        self._scale = max(MIN_SCALE, float(scale))
        self._structure_vertex_count = max(MIN_VERTEX_COUNT, int(structure_vertex_count))
        self._polygon_vertex_count = max(MIN_VERTEX_COUNT, int(polygon_vertex_count))
        self._drawing_options = drawing_options
        self._stroke_color_scheme = stroke_color_scheme
        self._fill_color_scheme = fill_color_scheme

    def __repr__(self) -> str:
        return (
            f"RenderConfig(layer_count={self._layer_count}, scale={self._scale}, "
            f"structure_vertex_count={self._structure_vertex_count}, "
            f"polygon_vertex_count={self._polygon_vertex_count}, "
            f"drawing_options={self._drawing_options!r}, "
            f"stroke_color_scheme={self._stroke_color_scheme!r}, "
            f"fill_color_scheme={self._fill_color_scheme!r})"
        )

    # -- change notification ------------------------------------------------

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """Call ``listener(config, field_name)`` after every setter.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self, name: str) -> None:
        for listener in list(self._listeners):
            listener(self, name)

    # -- fields ---------------------------------------------------------------

    @property
    def layer_count(self) -> int:
        return self._layer_count

    @layer_count.setter
    def layer_count(self, value: int) -> None:
        self._layer_count = max(MIN_LAYER_COUNT, int(value))
        self._changed("layer_count")

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = max(MIN_SCALE, float(value))
        self._changed("scale")

    @property
    def structure_vertex_count(self) -> int:
        return self._structure_vertex_count

    @structure_vertex_count.setter
    def structure_vertex_count(self, value: int) -> None:
        self._structure_vertex_count = max(MIN_VERTEX_COUNT, int(value))
        self._changed("structure_vertex_count")

    @property
    def polygon_vertex_count(self) -> int:
        return self._polygon_vertex_count

    @polygon_vertex_count.setter
    def polygon_vertex_count(self, value: int) -> None:
        self._polygon_vertex_count = max(MIN_VERTEX_COUNT, int(value))
        self._changed("polygon_vertex_count")

    @property
    def drawing_options(self) -> DrawingOptions:
        return self._drawing_options

    @drawing_options.setter
    def drawing_options(self, value: DrawingOptions) -> None:
        self._drawing_options = value
        self._changed("drawing_options")

    @property
    def stroke_color_scheme(self) -> ColorScheme | None:
        return self._stroke_color_scheme

    @stroke_color_scheme.setter
    def stroke_color_scheme(self, value: ColorScheme | None) -> None:
        self._stroke_color_scheme = value
        self._changed("stroke_color_scheme")

    @property
    def fill_color_scheme(self) -> ColorScheme | None:
        return self._fill_color_scheme

    @fill_color_scheme.setter
    def fill_color_scheme(self, value: ColorScheme | None) -> None:
        self._fill_color_scheme = value
        self._changed("fill_color_scheme")

    def has_option(self, option: DrawingOptions) -> bool:
        return option in self._drawing_options
