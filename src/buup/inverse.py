"""
Inverse pairs between transformers.

The relation is kept here, as one flat table, so that transformer classes
never reference each other. A pair ``(a, b)`` makes ``a`` the inverse of
``b`` and ``b`` the inverse of ``a``; ids in ``SELF_INVERSE`` are their own
inverse. Everything else has no inverse.

Most pairs recover their input exactly. A few are quasi-inverses, where the
second round trip is stable but the first may normalize the text:

- ``sqlformat`` / ``sqlminify`` and ``jsformat`` / ``jsminify`` rewrite
  whitespace, keyword case and comments.
- ``hextohsl`` / ``hsltohex`` and ``rgbtohsl`` / ``hsltorgb`` round HSL to
  whole degrees and percents, so ``#123456`` comes back as ``#123354``.
- ``morseencode`` / ``morsedecode`` only carry upper-case letters, so
  ``Hello`` comes back as ``HELLO``.
"""

from __future__ import annotations

from buup.registry import TransformerRegistry, get_registry
from buup.transformers.base import Transformer
from buup.types import ConstructionConflictError

INVERSE_PAIRS: tuple[tuple[str, str], ...] = (
    ("base64encode", "base64decode"),
    ("urlencode", "urldecode"),
    ("htmlencode", "htmldecode"),
    ("hexencode", "hexdecode"),
    ("base64tohex", "hextobase64"),
    ("binaryencode", "binarydecode"),
    ("asciitohex", "hextoascii"),
    ("morseencode", "morsedecode"),
    ("decimaltobinary", "binarytodecimal"),
    ("decimaltohex", "hextodecimal"),
    ("decimaltooctal", "octaltodecimal"),
    ("binarytohex", "hextobinary"),
    ("jsonformat", "jsonminify"),
    ("xmlformat", "xmlminify"),
    ("sqlformat", "sqlminify"),
    ("jsformat", "jsminify"),
    ("deflatecompress", "deflatedecompress"),
    ("gzipcompress", "gzipdecompress"),
    ("hextorgb", "rgbtohex"),
    ("hextohsl", "hsltohex"),
    ("rgbtohsl", "hsltorgb"),
    ("cameltosnake", "snaketocamel"),
    ("csvtojson", "jsontocsv"),
    ("utctosydney", "sydneytoutc"),
)

SELF_INVERSE: frozenset[str] = frozenset({"rot13", "textreverse"})


def _build_inverse_table() -> dict[str, str]:
    table: dict[str, str] = {}
    entries = [*INVERSE_PAIRS, *((item, item) for item in sorted(SELF_INVERSE))]
    for first, second in entries:
        for key, value in ((first, second), (second, first)):
            if table.get(key, value) != value:
                raise ConstructionConflictError(
                    f"Transformer '{key}' is declared with two inverses: '{table[key]}' and '{value}'"
                )
            table[key] = value
    return table


_INVERSES = _build_inverse_table()


def inverse_of(transformer_id: str) -> str | None:
    """
    Return the id of the inverse transformer.

    Parameters
    ----------
    transformer_id : str
        Transformer identifier; unknown ids are not an error.

    Returns
    -------
    str or None
        Inverse id, the same id for self-inverse transformers, or None when
        no inverse is defined.
    """
    return _INVERSES.get(transformer_id)


def inverse_transformer(
    transformer: Transformer | str,
    registry: TransformerRegistry | None = None,
) -> Transformer | None:
    """
    Resolve the inverse of a transformer to a registered instance.

    Parameters
    ----------
    transformer : Transformer or str
        Transformer instance or id.
    registry : TransformerRegistry, optional
        Registry to resolve against; the process-wide one by default.

    Returns
    -------
    Transformer or None
        The inverse instance, or None when there is no inverse.
    """
    transformer_id = transformer if isinstance(transformer, str) else transformer.id
    inverse_id = inverse_of(transformer_id)
    if inverse_id is None:
        return None
    registry = registry if registry is not None else get_registry()
    return registry.lookup(inverse_id)


def transformer_pairs(
    registry: TransformerRegistry | None = None,
) -> list[tuple[Transformer, Transformer | None]]:
    """List every registered transformer with its inverse (or None), sorted by id."""
    registry = registry if registry is not None else get_registry()
    return [(transformer, inverse_transformer(transformer, registry)) for transformer in registry.all()]


def validate_inverse_table(registry: TransformerRegistry) -> None:
    """
    Check that every id in the inverse table is registered.

    Parameters
    ----------
    registry : TransformerRegistry
        Registry to check against.

    Raises
    ------
    ConstructionConflictError
        If the table names an unregistered id.
    """
    missing = sorted(key for key in _INVERSES if key not in registry)
    if missing:
        raise ConstructionConflictError(f"Inverse table names unregistered transformers: {', '.join(missing)}")
