"""Tests for the categorized listing views."""
# ruff: noqa: S101
# pylint: disable=import-error

from __future__ import annotations

from buup.listing import ID_COLUMN_WIDTH, categorized_listing, render_listing, selector_choices
from buup.registry import TransformerRegistry, get_registry
from buup.transformers.encoding import Base64Decode, Base64Encode, UrlEncode
from buup.types import CATEGORY_ORDER, TransformerCategory


def _registry() -> TransformerRegistry:
    registry = TransformerRegistry()
    for transformer_cls in (UrlEncode, Base64Decode, Base64Encode):
        registry.register(transformer_cls())
    registry.freeze()
    return registry


def test_categorized_listing_order() -> None:
    """Categories follow display order; ids are sorted within each."""
    listing = categorized_listing(_registry())
    assert [category for category, _ in listing] == list(CATEGORY_ORDER)
    encoders = dict(listing)[TransformerCategory.ENCODER]
    assert [info.id for info in encoders] == ["base64encode", "urlencode"]
    assert dict(listing)[TransformerCategory.COLOR] == []


def test_categorized_listing_covers_default_registry() -> None:
    """Every registered transformer appears exactly once."""
    ids = [info.id for _, infos in categorized_listing() for info in infos]
    assert sorted(ids) == get_registry().ids()


def test_render_listing() -> None:
    """Rendered text has upper-case headings and padded ids."""
    text = render_listing(categorized_listing(_registry()))
    assert text == (
        "ENCODERS:\n"
        f"  {'base64encode':<{ID_COLUMN_WIDTH}} - Encode text to Base64 format\n"
        f"  {'urlencode':<{ID_COLUMN_WIDTH}} - Encode text for use in URLs\n"
        "\n"
        "DECODERS:\n"
        f"  {'base64decode':<{ID_COLUMN_WIDTH}} - Decode Base64 text to plain text"
    )
    assert "COLORS:" not in text


def test_selector_choices() -> None:
    """Dropdown choices pair a grouped label with the id."""
    choices = selector_choices(_registry())
    assert choices == [
        ("Encoders / Base64 Encode", "base64encode"),
        ("Encoders / URL Encode", "urlencode"),
        ("Decoders / Base64 Decode", "base64decode"),
    ]
