#!/usr/bin/env python3
"""Batch render a gallery of preset configurations to SVG and PNG.

Outputs go to /tmp/prismal_gallery/.

Usage:
    python scripts/render_gallery.py [--seed N]
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from prismal.model.config import DrawingOptions, RenderConfig  # noqa: E402
from prismal.render.svg import render_drawing  # noqa: E402
from prismal.schemes import SCHEMES  # noqa: E402
from prismal.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/prismal_gallery")
SIZE = 800

STROKE = DrawingOptions.STROKE_POLYGONS
FILL = DrawingOptions.FILL_POLYGONS

GALLERY: dict[str, RenderConfig] = {
    "single": RenderConfig(),
    "hex_honeycomb": RenderConfig(
        layer_count=6, structure_vertex_count=6, polygon_vertex_count=6,
        drawing_options=STROKE | DrawingOptions.STROKE_STRUCTURE,
        stroke_color_scheme=SCHEMES["ocean"],
    ),
    "ember_triangles": RenderConfig(
        layer_count=8, scale=1.2,
        drawing_options=STROKE | FILL,
        stroke_color_scheme=SCHEMES["mono"], fill_color_scheme=SCHEMES["ember"],
    ),
    "aurora_circles": RenderConfig(
        layer_count=10, structure_vertex_count=5,
        drawing_options=FILL | DrawingOptions.REPLACE_WITH_CIRCLES | DrawingOptions.REVERSE_ORDER,
        fill_color_scheme=SCHEMES["aurora"],
    ),
    "random_overflow": RenderConfig(
        layer_count=12, scale=2.5, structure_vertex_count=4, polygon_vertex_count=4,
        drawing_options=STROKE | FILL | DrawingOptions.FILL_STRUCTURE,
    ),
}


def render_entry(
    name: str, config: RenderConfig, output_dir: Path, seed: int | None
) -> list[str]:
    """Render one gallery entry to SVG (and PNG when cairosvg is available).

    Returns a list of issues.
    """
    issues: list[str] = []

    try:
        d, report = render_drawing(config, SIZE, SIZE, THEMES["dark"], rng=random.Random(seed))
        svg_str = d.as_svg()
    except Exception as e:
        return [f"RENDER ERROR: {e}"]

    if report.terminated_early:
        issues.append(f"stopped after {len(report.layers)} of {config.layer_count} layers")

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return issues


def main():
    parser = argparse.ArgumentParser(description="Batch render the preset gallery")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random colors")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    print(f"Rendering {len(GALLERY)} configurations to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(name) for name in GALLERY)
    any_errors = False

    for name, config in GALLERY.items():
        issues = render_entry(name, config, OUTPUT_DIR, args.seed)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
