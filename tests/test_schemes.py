"""Tests for color-scheme presets."""

import pytest

from prismal.schemes import SCHEMES, resolve_scheme


@pytest.mark.parametrize("text", [None, "", "random"])
def test_no_scheme(text):
    assert resolve_scheme(text) is None


def test_preset():
    assert resolve_scheme("ocean") is SCHEMES["ocean"]


def test_hex_pair():
    scheme = resolve_scheme("#ff0000:#0000ff")
    assert scheme.inner.to_hex() == "#ff0000"
    assert scheme.outer.to_hex() == "#0000ff"


def test_unknown():
    with pytest.raises(ValueError, match="Unknown color scheme"):
        resolve_scheme("plaid")
