"""Tests for the CLI entry points."""

from click.testing import CliRunner

from prismal import __version__
from prismal.cli import cli


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", "--layers", "4", "--structure-vertices", "6",
        "--option", "stroke-polygons", "--option", "fill-polygons",
        "--fill-scheme", "ember", "--seed", "3", "-o", str(out),
    ])
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert "<svg" in out.read_text()
    assert "4 layers" in result.output


def test_render_hex_scheme(tmp_path):
    out = tmp_path / "hex.svg"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", "--layers", "2", "--stroke-scheme", "#00ff00:#0000ff", "-o", str(out),
    ])
    assert result.exit_code == 0, result.output
    assert "#00ff00" in out.read_text()


def test_render_bad_scheme(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", "--stroke-scheme", "plaid", "-o", str(tmp_path / "x.svg"),
    ])
    assert result.exit_code != 0
    assert "Unknown color scheme" in result.output


def test_render_bad_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "--option", "sparkle"])
    assert result.exit_code != 0


def test_info_reports_early_stop():
    runner = CliRunner()
    result = runner.invoke(cli, [
        "info", "--layers", "3", "--scale", "10", "--width", "100", "--height", "100",
    ])
    assert result.exit_code == 0, result.output
    assert "3 configured, 2 attempted" in result.output
    assert "Stopped early" in result.output


def test_info_reverse_order():
    runner = CliRunner()
    result = runner.invoke(cli, [
        "info", "--layers", "3", "--scale", "10", "--width", "100", "--height", "100",
        "--option", "reverse-order", "--option", "stroke-polygons",
    ])
    assert result.exit_code == 0, result.output
    assert "3 configured, 3 attempted" in result.output
    assert "Stopped early" not in result.output


def test_info_has_no_seed_option():
    """info output never depends on random colors."""
    runner = CliRunner()
    result = runner.invoke(cli, ["info", "--seed", "3"])
    assert result.exit_code == 2


def test_schemes_lists_presets():
    runner = CliRunner()
    result = runner.invoke(cli, ["schemes"])
    assert result.exit_code == 0
    assert "ember:" in result.output
    assert "ocean:" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
