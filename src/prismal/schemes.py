"""Named color-scheme presets for strokes and fills."""

from __future__ import annotations

__all__ = ["SCHEMES", "resolve_scheme"]

from prismal.model.color import Color, ColorScheme, parse_scheme_pair

SCHEMES: dict[str, ColorScheme] = {
    "ember": ColorScheme(
        inner=Color(0.14, 0.9, 1.0, 1.0),
        outer=Color(0.0, 1.0, 0.55, 0.85),
    ),
    "ocean": ColorScheme(
        inner=Color(0.47, 0.6, 0.95, 1.0),
        outer=Color(0.66, 0.9, 0.45, 0.8),
    ),
    "aurora": ColorScheme(
        inner=Color(0.33, 0.8, 0.9, 0.9),
        outer=Color(0.83, 0.7, 0.8, 0.9),
    ),
    "mono": ColorScheme(
        inner=Color(0.0, 0.0, 1.0, 1.0),
        outer=Color(0.0, 0.0, 0.25, 1.0),
    ),
}


def resolve_scheme(text: str | None) -> ColorScheme | None:
    """Look up a preset by name, or parse an ``INNER:OUTER`` hex pair.

    ``None``, ``""`` and ``"random"`` mean no scheme (random colors).
    """
    if text is None:
        return None
    key = text.strip()
    if key in ("", "random"):
        return None
    if key in SCHEMES:
        return SCHEMES[key]
    if ":" in key:
        return parse_scheme_pair(key)
    raise ValueError(
        f"Unknown color scheme {text!r}; use one of "
        f"{', '.join(sorted(SCHEMES))}, 'random', or INNER:OUTER hex colors"
    )
