"""Per-layer color resolution."""

from __future__ import annotations

__all__ = ["resolve_color"]

from prismal.model.color import Color, ColorScheme


def resolve_color(
    scheme: ColorScheme | None, layer_index: int, layer_count: int
) -> Color | None:
    """Blend a scheme's inner and outer color for the given layer.

    Each HSBA component is mixed linearly, so layer 0 gets the inner color
    and layer ``layer_count - 1`` the outer one. Returns None without a
    scheme; callers then pick a random color per polygon.
    """
    if scheme is None:
        return None
    if layer_count <= 1 or scheme.inner == scheme.outer:
        return scheme.inner

    segments = layer_count - 1
    inner_portion = (segments - layer_index) / segments
    outer_portion = layer_index / segments
    components = [
        inner_portion * inner + outer_portion * outer
        for inner, outer in zip(scheme.inner.components, scheme.outer.components)
    ]
    return Color(*components)
