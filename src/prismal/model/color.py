"""Colors in hue/saturation/brightness/alpha space."""

from __future__ import annotations

__all__ = ["Color", "ColorScheme", "parse_scheme_pair"]

import colorsys
import random
import re
from dataclasses import dataclass, fields

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Interpolated components may overshoot [0, 1] by float rounding.
_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Color:
    """An HSBA color, every component in [0, 1]."""

    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = float(getattr(self, f.name))
            if not -_TOLERANCE <= value <= 1 + _TOLERANCE:
                raise ValueError(f"Color {f.name} must lie in [0, 1], got {value}")
            object.__setattr__(self, f.name, min(1.0, max(0.0, value)))

    @classmethod
    def from_hex(cls, text: str, alpha: float = 1.0) -> Color:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f"Not a #rrggbb color: {text!r}")
        raw = m.group(1)
        r, g, b = (int(raw[i:i + 2], 16) / 255 for i in (0, 2, 4))
        h, s, v = colorsys.rgb_to_hsv(r, g, b)
        return cls(h, s, v, alpha)

    @classmethod
    def random(cls, rng: random.Random) -> Color:
        """Four independent uniform draws: hue, saturation, brightness, alpha."""
        return cls(rng.random(), rng.random(), rng.random(), rng.random())

    @property
    def components(self) -> tuple[float, float, float, float]:
        return (self.hue, self.saturation, self.brightness, self.alpha)

    @property
    def opacity(self) -> float:
        return self.alpha

    def to_rgb(self) -> tuple[float, float, float]:
        return colorsys.hsv_to_rgb(self.hue % 1.0, self.saturation, self.brightness)

    def to_hex(self) -> str:
        """The opaque part of the color as ``#rrggbb``."""
        r, g, b = (round(c * 255) for c in self.to_rgb())
        return f"#{r:02x}{g:02x}{b:02x}"


@dataclass(frozen=True)
class ColorScheme:
    """Colors for the innermost and outermost layer."""

    inner: Color
    outer: Color


def parse_scheme_pair(text: str) -> ColorScheme:
    """Parse an ``INNER:OUTER`` pair of hex colors."""
    inner, sep, outer = text.partition(":")
    if not sep:
        raise ValueError(f"Expected INNER:OUTER hex colors, got {text!r}")
    return ColorScheme(Color.from_hex(inner), Color.from_hex(outer))
