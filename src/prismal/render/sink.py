"""Drawing sinks and the drawable primitives painted onto them."""

from __future__ import annotations

__all__ = [
    "DrawablePolygon",
    "DrawingSink",
    "PaintOperation",
    "PathRole",
    "RecordingSink",
]

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from prismal.geometry.path import ClosedPath
from prismal.model.color import Color


class PathRole(Enum):
    """What a painted path represents."""

    POLYGON = "polygon"
    STRUCTURE = "structure"


class DrawingSink(Protocol):
    """Anything that can stroke and fill closed paths."""

    def stroke_path(self, path: ClosedPath, color: Color, role: PathRole) -> None: ...

    def fill_path(self, path: ClosedPath, color: Color, role: PathRole) -> None: ...


@dataclass(frozen=True)
class DrawablePolygon:
    """One resolved primitive of a render pass."""

    path: ClosedPath
    stroke_color: Color | None
    fill_color: Color | None
    stroke: bool
    fill: bool
    layer_index: int
    role: PathRole = PathRole.POLYGON

    def paint(self, sink: DrawingSink) -> None:
        """Stroke, then fill, as the style flags ask."""
        if self.stroke and self.stroke_color is not None:
            sink.stroke_path(self.path, self.stroke_color, self.role)
        if self.fill and self.fill_color is not None:
            sink.fill_path(self.path, self.fill_color, self.role)


@dataclass(frozen=True)
class PaintOperation:
    """A single call received by a RecordingSink."""

    kind: str  # "stroke" or "fill"
    path: ClosedPath
    color: Color
    role: PathRole


@dataclass
class RecordingSink:
    """Sink that keeps every paint call in order."""

    operations: list[PaintOperation] = field(default_factory=list)

    def stroke_path(self, path: ClosedPath, color: Color, role: PathRole) -> None:
        self.operations.append(PaintOperation("stroke", path, color, role))

    def fill_path(self, path: ClosedPath, color: Color, role: PathRole) -> None:
        self.operations.append(PaintOperation("fill", path, color, role))

    def by_role(self, role: PathRole) -> list[PaintOperation]:
        return [op for op in self.operations if op.role is role]
