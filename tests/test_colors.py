"""Tests for color conversions."""
# ruff: noqa: S101
# pylint: disable=import-error

from __future__ import annotations

import pytest

from buup.registry import get_transformer
from buup.transformers.colors import Color, _ColorConversion  # pylint: disable=protected-access
from buup.types import InvalidInputError


def run(transformer_id: str, text: str) -> str:
    return get_transformer(transformer_id).transform(text)


@pytest.mark.parametrize(
    ("transformer_id", "text", "expected"),
    [
        ("hextorgb", "#FF0000", "rgb(255,0,0)"),
        ("hextorgb", "#00ff0080", "rgb(0,255,0,128)"),
        ("rgbtohex", "rgb(255, 128, 0)", "#ff8000"),
        ("hextohsl", "#00FF00", "hsl(120deg,100%,50%)"),
        ("hsltohex", "hsl(240deg, 100%, 50%)", "#0000ff"),
        ("rgbtohsl", "rgb(255, 255, 255)", "hsl(0deg,0%,100%)"),
        ("hsltorgb", "hsl(0deg, 100%, 50%)", "rgb(255,0,0)"),
        ("hsltorgb", "HSL(360, 100%, 25%)", "rgb(128,0,0)"),
    ],
)
def test_color_conversions(transformer_id: str, text: str, expected: str) -> None:
    """Conversions between hex, rgb and hsl."""
    assert run(transformer_id, text) == expected


@pytest.mark.parametrize(
    ("transformer_id", "text", "match"),
    [
        ("hextorgb", "FF0000", "Must start with #"),
        ("hextorgb", "#FF00", "Invalid hex color"),
        ("rgbtohex", "#FF0000", "Must start with rgb"),
        ("rgbtohex", "rgb(256, 0, 0)", "Invalid RGB value"),
        ("rgbtohex", "rgb(1, 2)", "expected 3 or 4 values"),
        ("hsltohex", "hsl(a, 10%, 10%)", "Invalid color value"),
        ("hsltorgb", "", "Must start with hsl"),
    ],
)
def test_color_invalid(transformer_id: str, text: str, match: str) -> None:
    """Wrong prefixes, channel ranges and arity are rejected."""
    with pytest.raises(InvalidInputError, match=match):
        run(transformer_id, text)


def test_color_parse_dispatch() -> None:
    """Color.parse recognises every notation."""
    red = Color(255, 0, 0)
    assert Color.parse("#ff0000") == red
    assert Color.parse("rgb(255,0,0)") == red
    assert Color.parse("hsl(0deg,100%,50%)") == red
    assert Color.parse("cmyk(0%,100%,100%,0%)") == red
    with pytest.raises(InvalidInputError, match="Unsupported color format"):
        Color.parse("red")


def test_color_code_convert() -> None:
    """All notations are printed for one color."""
    assert run("colorcodeconvert", "#FF0000") == (
        "HEX: #ff0000\nRGB: rgb(255,0,0)\nHSL: hsl(0deg,100%,50%)\nCMYK: cmyk(0%,100%,100%,0%)"
    )


def test_cmyk_black() -> None:
    """Pure black has zero chroma channels."""
    assert Color(0, 0, 0).to_cmyk() == "cmyk(0%,0%,0%,100%)"


def test_conversion_requires_render() -> None:
    """A color conversion cannot be built without a render method."""

    class Partial(_ColorConversion):
        id = "partial"
        name = "Partial"
        description = "No render"
        source_prefix, source_label = "#", "hex"

    with pytest.raises(TypeError):
        _ColorConversion()
    with pytest.raises(TypeError):
        Partial()
