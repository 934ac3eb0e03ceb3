"""Tests for the HSBA color model and per-layer color resolution."""

from __future__ import annotations

import random

import pytest

from prismal.model.color import Color, ColorScheme, parse_scheme_pair
from prismal.render.colors import resolve_color

INNER = Color(0.1, 0.2, 0.9, 1.0)
OUTER = Color(0.7, 0.8, 0.3, 0.5)
SCHEME = ColorScheme(INNER, OUTER)


class TestColor:
    def test_out_of_range_component(self):
        with pytest.raises(ValueError):
            Color(0.5, 1.5, 0.5)

    def test_rounding_overshoot_is_clamped(self):
        assert Color(1.0 + 1e-12, 0.0, 0.0).hue == 1.0

    def test_from_hex(self):
        red = Color.from_hex("#ff0000")
        assert red.components == pytest.approx((0.0, 1.0, 1.0, 1.0))
        assert red.to_hex() == "#ff0000"

    def test_from_hex_without_hash(self):
        assert Color.from_hex("00ff00", alpha=0.5).to_hex() == "#00ff00"

    @pytest.mark.parametrize("text", ["#fff", "red", "#gg0000", ""])
    def test_from_hex_rejects(self, text: str):
        with pytest.raises(ValueError):
            Color.from_hex(text)

    def test_random_uses_four_draws(self):
        color = Color.random(random.Random(42))
        expected = random.Random(42)
        assert color.components == tuple(expected.random() for _ in range(4))

    def test_parse_scheme_pair(self):
        scheme = parse_scheme_pair("#ffffff:#000000")
        assert scheme.inner.to_hex() == "#ffffff"
        assert scheme.outer.to_hex() == "#000000"

    def test_parse_scheme_pair_needs_separator(self):
        with pytest.raises(ValueError):
            parse_scheme_pair("#ffffff")


class TestResolveColor:
    def test_no_scheme(self):
        assert resolve_color(None, 0, 5) is None

    def test_single_layer_uses_inner(self):
        assert resolve_color(SCHEME, 0, 1) == INNER

    def test_equal_colors_use_inner(self):
        assert resolve_color(ColorScheme(INNER, INNER), 3, 5) == INNER

    def test_endpoints_are_exact(self):
        assert resolve_color(SCHEME, 0, 4) == INNER
        assert resolve_color(SCHEME, 3, 4) == OUTER

    def test_linear_between_endpoints(self):
        layer_count = 5
        for layer in range(layer_count):
            t = layer / (layer_count - 1)
            color = resolve_color(SCHEME, layer, layer_count)
            for value, inner, outer in zip(color.components, INNER.components, OUTER.components):
                assert value == pytest.approx(inner + t * (outer - inner))

    def test_midpoint(self):
        color = resolve_color(SCHEME, 1, 3)
        assert color.components == pytest.approx((0.4, 0.5, 0.6, 0.75))
