"""
Transformers registry.

Every transformer is registered once, by id, from the explicit
``DEFAULT_TRANSFORMERS`` list. The process-wide registry is built on first
use and frozen; after that it is only read, so concurrent lookups need no
locking.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from buup.transformers import case, colors, compression, crypto, data, encoding, formatters, misc, numbers, text
from buup.transformers.base import Transformer
from buup.types import (
    CATEGORY_ORDER,
    ConstructionConflictError,
    TransformerCategory,
    UnknownTransformerError,
)

logger = logging.getLogger(__name__)

DEFAULT_TRANSFORMERS: tuple[type[Transformer], ...] = (
    # Encoders / decoders
    encoding.Base64Encode,
    encoding.Base64Decode,
    encoding.UrlEncode,
    encoding.UrlDecode,
    encoding.HtmlEncode,
    encoding.HtmlDecode,
    encoding.HexEncode,
    encoding.HexDecode,
    encoding.Base64ToHex,
    encoding.HexToBase64,
    encoding.BinaryEncode,
    encoding.BinaryDecode,
    encoding.AsciiToHex,
    encoding.HexToAscii,
    encoding.MorseEncode,
    encoding.MorseDecode,
    encoding.Rot13,
    encoding.JwtDecode,
    # Number bases
    numbers.DecimalToBinary,
    numbers.BinaryToDecimal,
    numbers.DecimalToHex,
    numbers.HexToDecimal,
    numbers.DecimalToOctal,
    numbers.OctalToDecimal,
    numbers.BinaryToHex,
    numbers.HexToBinary,
    # Formatters
    formatters.JsonFormat,
    formatters.JsonMinify,
    formatters.XmlFormat,
    formatters.XmlMinify,
    formatters.SqlFormat,
    formatters.SqlMinify,
    formatters.JsFormat,
    formatters.JsMinify,
    formatters.MarkdownToHtml,
    formatters.HtmlToMarkdown,
    formatters.LineNumberAdder,
    formatters.LineNumberRemover,
    # Crypto
    crypto.Md5Hash,
    crypto.Sha1Hash,
    crypto.Sha256Hash,
    crypto.Uuid5Generate,
    misc.UuidGenerate,
    # Compression
    compression.DeflateCompress,
    compression.DeflateDecompress,
    compression.GzipCompress,
    compression.GzipDecompress,
    # Colors
    colors.HexToRgb,
    colors.RgbToHex,
    colors.HexToHsl,
    colors.HslToHex,
    colors.RgbToHsl,
    colors.HslToRgb,
    colors.ColorCodeConvert,
    # Text and case
    text.TextReverse,
    text.TextStats,
    text.LineSorter,
    text.UniqueLines,
    text.WhitespaceRemover,
    case.ToCamelCase,
    case.ToPascalCase,
    case.ToSnakeCase,
    case.ToKebabCase,
    case.ToConstantCase,
    case.CamelToSnake,
    case.SnakeToCamel,
    case.Slugify,
    # Tables, URLs, UUIDs and time
    data.CsvToJson,
    data.JsonToCsv,
    misc.UrlParser,
    misc.UuidToTimestamp,
    misc.UtcToSydney,
    misc.SydneyToUtc,
)


class TransformerRegistry:
    """
    Mapping from transformer id to its single shared instance.

    The registry accepts registrations until ``freeze()`` is called and is
    read-only afterwards.
    """

    def __init__(self) -> None:
        self._transformers: dict[str, Transformer] = {}
        self._frozen = False

    def register(self, transformer: Transformer) -> None:
        """
        Register a transformer instance.

        Parameters
        ----------
        transformer : Transformer
            Instance to register under ``transformer.id``.

        Raises
        ------
        ConstructionConflictError
            If a transformer with the same id is already registered.
        RuntimeError
            If the registry has been frozen.
        """
        if self._frozen:
            raise RuntimeError("Registry is frozen; transformers can only be registered during construction")
        if transformer.id in self._transformers:
            existing = self._transformers[transformer.id]
            raise ConstructionConflictError(
                f"Duplicate transformer id '{transformer.id}': {existing!r} and {transformer!r}"
            )
        self._transformers[transformer.id] = transformer
        logger.debug("Registered transformer %s (%s)", transformer.id, transformer.category)

    def freeze(self) -> None:
        """Reject further registrations."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, transformer_id: str) -> Transformer | None:
        """Return the transformer for ``transformer_id``, or None if unknown."""
        return self._transformers.get(transformer_id)

    def get(self, transformer_id: str) -> Transformer:
        """
        Get a transformer by id.

        Parameters
        ----------
        transformer_id : str
            Transformer identifier.

        Returns
        -------
        Transformer
            The registered instance.

        Raises
        ------
        UnknownTransformerError
            If transformer_id is not registered.
        """
        transformer = self.lookup(transformer_id)
        if transformer is None:
            raise UnknownTransformerError(transformer_id, self.ids())
        return transformer

    def all(self) -> list[Transformer]:
        """
        List every registered transformer.

        Returns
        -------
        list[Transformer]
            Transformers sorted by id.
        """
        return [self._transformers[key] for key in self.ids()]

    def ids(self) -> list[str]:
        """Sorted list of registered ids."""
        return sorted(self._transformers)

    def by_category(self) -> dict[TransformerCategory, list[Transformer]]:
        """
        Group transformers by category.

        Returns
        -------
        dict[TransformerCategory, list[Transformer]]
            Every category in display order, each mapped to its transformers
            sorted by id (possibly empty).
        """
        grouped: dict[TransformerCategory, list[Transformer]] = {category: [] for category in CATEGORY_ORDER}
        for transformer in self.all():
            grouped[transformer.category].append(transformer)
        return grouped

    def __contains__(self, transformer_id: object) -> bool:
        return transformer_id in self._transformers

    def __len__(self) -> int:
        return len(self._transformers)

    def __iter__(self) -> Iterator[Transformer]:
        return iter(self.all())


def build_default_registry() -> TransformerRegistry:
    """
    Build a frozen registry holding every default transformer.

    Returns
    -------
    TransformerRegistry
        Registry with one instance per class in ``DEFAULT_TRANSFORMERS``.

    Raises
    ------
    ConstructionConflictError
        If two default transformers share an id.
    """
    registry = TransformerRegistry()
    for transformer_cls in DEFAULT_TRANSFORMERS:
        registry.register(transformer_cls())
    registry.freeze()
    logger.debug("Built transformer registry with %s transformers", len(registry))
    return registry


_REGISTRY: TransformerRegistry | None = None
_REGISTRY_LOCK = threading.Lock()


def get_registry() -> TransformerRegistry:
    """
    Return the process-wide registry, building it on first use.

    Returns
    -------
    TransformerRegistry
        The shared, frozen registry.
    """
    global _REGISTRY  # pylint: disable=global-statement
    if _REGISTRY is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                _REGISTRY = build_default_registry()
    return _REGISTRY


def get_transformer(transformer_id: str) -> Transformer:
    """
    Get a transformer from the process-wide registry.

    Raises
    ------
    UnknownTransformerError
        If transformer_id is not registered.
    """
    return get_registry().get(transformer_id)


def lookup_transformer(transformer_id: str) -> Transformer | None:
    """Look up a transformer in the process-wide registry, returning None if unknown."""
    return get_registry().lookup(transformer_id)


def list_transformers() -> list[str]:
    """
    List registered transformer identifiers.

    Returns
    -------
    list[str]
        Sorted transformer ids.
    """
    return get_registry().ids()


def apply_transformer(transformer_id: str, text: str) -> str:
    """
    Apply a registered transformer to the input text.

    Parameters
    ----------
    transformer_id : str
        Transformer identifier.
    text : str
        Input text.

    Returns
    -------
    str
        Transformed text.

    Raises
    ------
    UnknownTransformerError
        If transformer_id is not registered.
    InvalidInputError
        If the transformer rejects the input.
    """
    return get_transformer(transformer_id).transform(text)
