"""CLI for prismal."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import click

from prismal import __version__
from prismal.layout.bounds import Rect
from prismal.model.config import DrawingOptions, RenderConfig
from prismal.render.constants import DEFAULT_HEIGHT, DEFAULT_OUTPUT, DEFAULT_WIDTH, PNG_SCALE
from prismal.render.orchestrator import RenderReport, render_layers
from prismal.render.sink import RecordingSink
from prismal.render.svg import render_drawing
from prismal.schemes import SCHEMES, resolve_scheme
from prismal.themes import THEMES


def _config_options(func):
    """Options shared by every command that builds a RenderConfig."""
    options = [
        click.option("--layers", type=int, default=1, show_default=True,
                     help="Number of concentric layers"),
        click.option("--scale", type=float, default=1.0, show_default=True,
                     help="Radial scale factor"),
        click.option("--structure-vertices", type=int, default=3, show_default=True,
                     help="Vertices of each layer's structure polygon"),
        click.option("--polygon-vertices", type=int, default=3, show_default=True,
                     help="Vertices of each drawn polygon"),
        click.option("--option", "options", multiple=True,
                     type=click.Choice(DrawingOptions.names()),
                     help="Drawing option (repeatable). Default: stroke-polygons"),
        click.option("--stroke-scheme", default=None,
                     help="Stroke color scheme: preset name or INNER:OUTER hex pair"),
        click.option("--fill-scheme", default=None,
                     help="Fill color scheme: preset name or INNER:OUTER hex pair"),
        click.option("--width", type=int, default=DEFAULT_WIDTH, show_default=True,
                     help="Surface width in pixels"),
        click.option("--height", type=int, default=DEFAULT_HEIGHT, show_default=True,
                     help="Surface height in pixels"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(
    layers: int,
    scale: float,
    structure_vertices: int,
    polygon_vertices: int,
    options: tuple[str, ...],
    stroke_scheme: str | None,
    fill_scheme: str | None,
) -> RenderConfig:
    try:
        drawing_options = (
            DrawingOptions.parse(options) if options else DrawingOptions.STROKE_POLYGONS
        )
        stroke = resolve_scheme(stroke_scheme)
        fill = resolve_scheme(fill_scheme)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    return RenderConfig(
        layer_count=layers,
        scale=scale,
        structure_vertex_count=structure_vertices,
        polygon_vertex_count=polygon_vertices,
        drawing_options=drawing_options,
        stroke_color_scheme=stroke,
        fill_color_scheme=fill,
    )


def _echo_report(report: RenderReport) -> None:
    for layer in report.layers:
        click.echo(f"  layer {layer.index}: {layer.centers} centers, "
                   f"{layer.drawn} drawn, {layer.culled} culled"
                   + (", structure" if layer.structure_drawn else ""))
    if report.terminated_early:
        click.echo("Stopped early: a layer drew nothing")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Log render progress (-vv for debug)")
def cli(verbose: int) -> None:
    """prismal: Render concentric layers of regular polygons to SVG."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@_config_options
@click.option("-o", "--output", type=click.Path(path_type=Path),
              default=Path(DEFAULT_OUTPUT), show_default=True,
              help="Output SVG file path")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--png", is_flag=True, default=False,
              help="Also write a PNG next to the SVG (requires cairosvg)")
@click.option("--seed", type=int, default=None, help="Seed for random colors")
def render(
    layers: int,
    scale: float,
    structure_vertices: int,
    polygon_vertices: int,
    options: tuple[str, ...],
    stroke_scheme: str | None,
    fill_scheme: str | None,
    width: int,
    height: int,
    output: Path,
    theme: str,
    png: bool,
    seed: int | None,
) -> None:
    """Render a layered polygon pattern to SVG."""
    config = _build_config(layers, scale, structure_vertices, polygon_vertices,
                           options, stroke_scheme, fill_scheme)

    d, report = render_drawing(config, width, height, THEMES[theme],
                               rng=random.Random(seed))
    svg = d.as_svg()
    output.write_text(svg)
    click.echo(f"Rendered {report.polygons_drawn} polygons in "
               f"{len(report.layers)} layers -> {output}")

    if png:
        try:
            import cairosvg
        except ImportError:
            raise click.ClickException(
                "PNG export needs cairosvg: pip install 'prismal[png]'"
            ) from None
        png_path = output.with_suffix(".png")
        cairosvg.svg2png(bytestring=svg.encode(), write_to=str(png_path), scale=PNG_SCALE)
        click.echo(f"  -> {png_path}")


@cli.command()
@_config_options
def info(
    layers: int,
    scale: float,
    structure_vertices: int,
    polygon_vertices: int,
    options: tuple[str, ...],
    stroke_scheme: str | None,
    fill_scheme: str | None,
    width: int,
    height: int,
) -> None:
    """Show which layers a configuration draws, without writing a file."""
    config = _build_config(layers, scale, structure_vertices, polygon_vertices,
                           options, stroke_scheme, fill_scheme)
    sink = RecordingSink()
    report = render_layers(config, Rect.of_size(width, height), sink)

    click.echo(f"Surface: {width}x{height}")
    click.echo(f"Layers: {config.layer_count} configured, {len(report.layers)} attempted")
    _echo_report(report)
    click.echo(f"Polygons: {report.polygons_drawn}")
    click.echo(f"Paint operations: {len(sink.operations)}")


@cli.command()
def schemes() -> None:
    """List the color-scheme presets."""
    for name, scheme in SCHEMES.items():
        click.echo(f"{name}: {scheme.inner.to_hex()} -> {scheme.outer.to_hex()}")
