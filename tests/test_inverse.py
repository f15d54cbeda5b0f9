"""
Tests for the inverse resolver.

Checks symmetry of the pair table, the round-trip laws of every declared
pair over the default test inputs and varied samples, and the stability of
the quasi-inverse pairs.
"""
# ruff: noqa: S101
# pylint: disable=import-error

from __future__ import annotations

import pytest

from buup import inverse
from buup.inverse import (
    INVERSE_PAIRS,
    SELF_INVERSE,
    inverse_of,
    inverse_transformer,
    transformer_pairs,
    validate_inverse_table,
)
from buup.registry import TransformerRegistry, get_registry, get_transformer, lookup_transformer
from buup.types import ConstructionConflictError

# Normalizing pairs: formatter output comes from the library, HSL is rounded.
NON_CANONICAL_PAIRS = {
    ("sqlformat", "sqlminify"),
    ("jsformat", "jsminify"),
    ("hextohsl", "hsltohex"),
    ("rgbtohsl", "hsltorgb"),
}

ROUND_TRIP_PAIRS = [pair for pair in INVERSE_PAIRS if pair not in NON_CANONICAL_PAIRS]


@pytest.mark.parametrize(("first", "second"), INVERSE_PAIRS)
def test_inverse_symmetry(first: str, second: str) -> None:
    """Both members of a pair resolve to each other."""
    assert inverse_of(first) == second
    assert inverse_of(second) == first


@pytest.mark.parametrize("transformer_id", sorted(SELF_INVERSE))
def test_self_inverse(transformer_id: str) -> None:
    """Self-inverse transformers map to themselves and undo themselves."""
    assert inverse_of(transformer_id) == transformer_id
    transformer = get_transformer(transformer_id)
    sample = transformer.default_test_input
    assert transformer.transform(transformer.transform(sample)) == sample


def test_no_inverse_is_none() -> None:
    """Transformers without a pair, and unknown ids, have no inverse."""
    assert inverse_of("md5hash") is None
    assert inverse_of("uuidgenerate") is None
    assert inverse_of("not_a_real_id") is None
    assert inverse_transformer("textstats") is None


def test_inverse_transformer_resolves_instance() -> None:
    """inverse_transformer accepts an instance or an id."""
    encoder = get_transformer("base64encode")
    assert inverse_transformer(encoder) is get_transformer("base64decode")
    assert inverse_transformer("base64decode") is encoder


def test_transformer_pairs_cover_registry() -> None:
    """transformer_pairs lists every transformer once with its inverse."""
    pairs = transformer_pairs()
    assert [t.id for t, _ in pairs] == get_registry().ids()
    for transformer, inv in pairs:
        expected = inverse_of(transformer.id)
        assert (inv.id if inv else None) == expected


def test_inverse_table_matches_registry() -> None:
    """Every id named by the table is registered."""
    validate_inverse_table(get_registry())


def test_validate_inverse_table_missing_ids() -> None:
    """An empty registry fails validation."""
    with pytest.raises(ConstructionConflictError, match="unregistered transformers"):
        validate_inverse_table(TransformerRegistry())


def test_conflicting_pairs_raise(monkeypatch: pytest.MonkeyPatch) -> None:
    """An id declared with two different inverses is rejected."""
    monkeypatch.setattr(inverse, "INVERSE_PAIRS", (("a", "b"), ("a", "c")))
    with pytest.raises(ConstructionConflictError, match="two inverses"):
        inverse._build_inverse_table()  # pylint: disable=protected-access


@pytest.mark.parametrize(("first", "second"), ROUND_TRIP_PAIRS)
def test_round_trip_forward(first: str, second: str) -> None:
    """first(second(first(x))) == first(x) on first's default input."""
    forward, backward = get_transformer(first), get_transformer(second)
    encoded = forward.transform(forward.default_test_input)
    assert forward.transform(backward.transform(encoded)) == encoded


@pytest.mark.parametrize(("first", "second"), ROUND_TRIP_PAIRS)
def test_round_trip_backward(first: str, second: str) -> None:
    """second(first(second(y))) == second(y) on second's default input."""
    forward, backward = get_transformer(first), get_transformer(second)
    decoded = backward.transform(backward.default_test_input)
    assert backward.transform(forward.transform(decoded)) == decoded


@pytest.mark.parametrize(
    ("encoder_id", "sample"),
    [
        ("base64encode", "Hello, World!"),
        ("urlencode", "Hello, world!"),
        ("hexencode", "héllo wörld"),
        ("binaryencode", "Hi there"),
        ("gzipcompress", "compress me " * 20),
        ("deflatecompress", "ünïcödé"),
        ("htmlencode", "<a href=\"x\">'&'</a>"),
    ],
)
def test_decode_of_encode_is_identity(encoder_id: str, sample: str) -> None:
    """Decoding an encoded sample gives the sample back."""
    decoder = inverse_transformer(encoder_id)
    assert decoder is not None
    assert decoder.transform(get_transformer(encoder_id).transform(sample)) == sample


def test_base64_scenario() -> None:
    """Base64 decoding and re-encoding keep a valid payload unchanged."""
    encoded = "SGVsbG8sIFdvcmxkIQ=="
    assert get_transformer("base64decode").transform(encoded) == "Hello, World!"
    decoded = get_transformer("base64decode").transform(encoded)
    assert get_transformer("base64encode").transform(decoded) == encoded


def test_urlencode_end_to_end() -> None:
    """Look up urlencode, encode, then decode through the resolved inverse."""
    encoder = lookup_transformer("urlencode")
    assert encoder is not None
    encoded = encoder.transform("Hello, world!")
    assert encoded == "Hello%2C%20world%21"

    inverse_id = inverse_of("urlencode")
    assert inverse_id == "urldecode"
    decoder = lookup_transformer(inverse_id)
    assert decoder is not None
    assert decoder.transform(encoded) == "Hello, world!"


@pytest.mark.parametrize(
    ("encoder_id", "sample"),
    [
        ("decimaltohex", "-255"),
        ("decimaltohex", "0"),
        ("decimaltohex", "18446744073709551616"),
        ("decimaltobinary", "-5"),
        ("decimaltooctal", "-64"),
        ("binarytohex", "-1111"),
        ("hextorgb", "#123456"),
        ("hextorgb", "#12345680"),
        ("asciitohex", "Hi there!"),
        ("base64tohex", "SGVsbG8="),
        ("morseencode", "SOS 2024"),
        ("jsonformat", '{"a":[1,2],"b":{"c":null}}'),
        ("cameltosnake", "userAccountId"),
        ("csvtojson", "name,age\nAda,36\nBob,7\n"),
        ("utctosydney", "2024-07-01T00:00:00Z"),
    ],
)
def test_round_trip_varied_inputs(encoder_id: str, sample: str) -> None:
    """Exact pairs give varied samples back, including negative numbers."""
    decoder = inverse_transformer(encoder_id)
    assert decoder is not None
    assert decoder.transform(get_transformer(encoder_id).transform(sample)) == sample


@pytest.mark.parametrize(
    ("to_hsl", "from_hsl", "sample"),
    [
        ("hextohsl", "hsltohex", "#123456"),
        ("hextohsl", "hsltohex", "#ff8800"),
        ("rgbtohsl", "hsltorgb", "rgb(18,52,86)"),
        ("rgbtohsl", "hsltorgb", "rgb(255,136,0)"),
    ],
)
def test_hsl_pairs_are_stable(to_hsl: str, from_hsl: str, sample: str) -> None:
    """A second pass through HSL gives the same result as the first."""
    forward, backward = get_transformer(to_hsl), get_transformer(from_hsl)
    hsl = forward.transform(sample)
    assert forward.transform(backward.transform(hsl)) == hsl
    once = backward.transform(hsl)
    assert backward.transform(forward.transform(once)) == once


def test_hsl_rounding_shifts_first_round_trip() -> None:
    """HSL rounding can move a channel on the first round trip."""
    hsl = get_transformer("hextohsl").transform("#123456")
    assert hsl == "hsl(210deg,65%,20%)"
    assert get_transformer("hsltohex").transform(hsl) == "#123354"


def test_morse_round_trip_upper_cases() -> None:
    """Morse carries letters only in upper case."""
    encoded = get_transformer("morseencode").transform("Hello")
    assert inverse_transformer("morseencode").transform(encoded) == "HELLO"
