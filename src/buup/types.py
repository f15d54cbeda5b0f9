"""
Shared types and error hierarchy.

Every transformer is described by the same small set of metadata:

- id: stable lowercase identifier used by the registry (e.g. ``base64encode``)
- title: human-readable display name
- description: one-line explanation of the effect
- category: one tag from the closed ``TransformerCategory`` set

Errors raised by the library all derive from ``BuupError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BuupError(Exception):
    """Base class for every error raised by the library."""


class TransformError(BuupError, ValueError):
    """A transformation could not be carried out."""


class InvalidInputError(TransformError):
    """The input text is malformed for the requested transformer."""


class UnknownTransformerError(BuupError, KeyError):
    """
    Lookup of an identifier that is not registered.

    Parameters
    ----------
    transformer_id : str
        The identifier that was requested.
    available : list[str], optional
        Registered identifiers, included in the message.
    """

    def __init__(self, transformer_id: str, available: list[str] | None = None) -> None:
        self.transformer_id = transformer_id
        self.available = sorted(available or [])
        message = f"Transformer '{transformer_id}' not found."
        if self.available:
            message += f" Available: {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class ConstructionConflictError(BuupError, RuntimeError):
    """The statically known transformer set violates a construction invariant."""


class TransformerCategory(Enum):
    """
    Closed set of tags used to group transformers in listings.

    The value is the slug accepted on the command line.
    """

    ENCODER = "encoders"
    DECODER = "decoders"
    FORMATTER = "formatters"
    CRYPTO = "crypto"
    COMPRESSION = "compression"
    COLOR = "colors"
    OTHER = "others"

    @property
    def label(self) -> str:
        """Display label used by listings."""
        return _CATEGORY_LABELS[self]

    @classmethod
    def from_slug(cls, slug: str) -> TransformerCategory:
        """
        Parse a category slug.

        Parameters
        ----------
        slug : str
            One of ``encoders``, ``decoders``, ``formatters``, ``crypto``,
            ``compression``, ``colors`` or ``others`` (case-insensitive).

        Returns
        -------
        TransformerCategory
            Matching category.

        Raises
        ------
        ValueError
            If the slug is unknown.
        """
        try:
            return cls(slug.strip().lower())
        except ValueError as e:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category '{slug}'. Expected one of: {valid}") from e

    def __str__(self) -> str:
        return self.value


_CATEGORY_LABELS = {
    TransformerCategory.ENCODER: "Encoders",
    TransformerCategory.DECODER: "Decoders",
    TransformerCategory.FORMATTER: "Formatters",
    TransformerCategory.CRYPTO: "Cryptography",
    TransformerCategory.COMPRESSION: "Compression",
    TransformerCategory.COLOR: "Colors",
    TransformerCategory.OTHER: "Other",
}

# Display order for listings.
CATEGORY_ORDER: tuple[TransformerCategory, ...] = (
    TransformerCategory.ENCODER,
    TransformerCategory.DECODER,
    TransformerCategory.FORMATTER,
    TransformerCategory.CRYPTO,
    TransformerCategory.COMPRESSION,
    TransformerCategory.COLOR,
    TransformerCategory.OTHER,
)


@dataclass(frozen=True)
class TransformerInfo:
    """
    Listing record for one transformer.

    Parameters
    ----------
    id : str
        Registry identifier.
    title : str
        Human-readable name.
    description : str
        One-line description.
    """

    id: str
    title: str
    description: str
