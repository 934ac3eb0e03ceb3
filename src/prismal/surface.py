"""A drawing surface that owns a configuration and redraws when it changes."""

from __future__ import annotations

__all__ = ["GeometrySurface"]

import logging
import random
from typing import Callable

from prismal.layout.bounds import Rect
from prismal.model.config import RenderConfig
from prismal.render.orchestrator import RenderReport, render_layers
from prismal.render.sink import DrawingSink
from prismal.render.style import DEFAULT_STRUCTURE_STYLE, StructureStyle

logger = logging.getLogger(__name__)


class GeometrySurface:
    """Owner of a RenderConfig and a surface size.

    Each configuration change or resize schedules exactly one redraw by
    calling ``on_redraw(surface)``. What a redraw means (painting right away,
    marking a window dirty) is up to the caller.
    """

    def __init__(
        self,
        width: float,
        height: float,
        config: RenderConfig | None = None,
        *,
        on_redraw: Callable[[GeometrySurface], None] | None = None,
        rng: random.Random | None = None,
        structure_style: StructureStyle = DEFAULT_STRUCTURE_STYLE,
    ) -> None:
        self.width = max(0.0, float(width))
        self.height = max(0.0, float(height))
        self._config = config if config is not None else RenderConfig()
        self.rng = rng if rng is not None else random.Random()
        self.structure_style = structure_style
        self.redraw_requests = 0
        self._on_redraw = on_redraw
        self._unsubscribe: Callable[[], None] | None = self._config.subscribe(
            self._config_changed
        )

    @property
    def config(self) -> RenderConfig:
        """The owned configuration; mutate it through its setters."""
        return self._config

    @property
    def bounds(self) -> Rect:
        return Rect.of_size(self.width, self.height)

    def _config_changed(self, config: RenderConfig, name: str) -> None:
        logger.debug("Configuration changed: %s", name)
        self.request_redraw()

    def request_redraw(self) -> None:
        self.redraw_requests += 1
        if self._on_redraw is not None:
            self._on_redraw(self)

    def resize(self, width: float, height: float) -> None:
        self.width = max(0.0, float(width))
        self.height = max(0.0, float(height))
        self.request_redraw()

    def render(self, sink: DrawingSink) -> RenderReport:
        """Run one full render pass over the current bounds."""
        return render_layers(
            self.config,
            self.bounds,
            sink,
            rng=self.rng,
            structure_style=self.structure_style,
        )

    def close(self) -> None:
        """Stop listening to configuration changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
