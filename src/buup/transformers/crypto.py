"""
Hash functions and name-based UUIDs.

Hashes are computed over the UTF-8 encoding of the input and returned as
lower-case hex digests. They are provided for convenience, not as a security
primitive.
"""

from __future__ import annotations

import hashlib
import uuid

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory

NAMESPACES = {
    "dns": uuid.NAMESPACE_DNS,
    "url": uuid.NAMESPACE_URL,
    "oid": uuid.NAMESPACE_OID,
    "x500": uuid.NAMESPACE_X500,
}


class _HashTransformer(Transformer):
    """Hex digest of the input using ``hashlib.new(algorithm)``."""

    algorithm: str
    category = TransformerCategory.CRYPTO

    def transform(self, text: str) -> str:
        return hashlib.new(self.algorithm, text.encode("utf-8")).hexdigest()


class Md5Hash(_HashTransformer):
    id = "md5hash"
    name = "MD5 Hash"
    description = "Compute the MD5 hash of the input text"
    algorithm = "md5"


class Sha1Hash(_HashTransformer):
    id = "sha1hash"
    name = "SHA-1 Hash"
    description = "Compute the SHA-1 hash of the input text (SHA-1 is cryptographically weak)"
    algorithm = "sha1"


class Sha256Hash(_HashTransformer):
    id = "sha256hash"
    name = "SHA-256 Hash"
    description = "Compute the SHA-256 hash of the input text"
    algorithm = "sha256"


def parse_namespace(value: str) -> uuid.UUID:
    """
    Resolve a UUID namespace.

    Parameters
    ----------
    value : str
        A UUID string or one of ``dns``, ``url``, ``oid``, ``x500``
        (optionally prefixed with ``namespace_``).

    Returns
    -------
    uuid.UUID
        Namespace UUID.

    Raises
    ------
    InvalidInputError
        If the value is neither a known alias nor a valid UUID.
    """
    key = value.strip().lower().removeprefix("namespace_")
    if key in NAMESPACES:
        return NAMESPACES[key]
    try:
        return uuid.UUID(value.strip())
    except ValueError as e:
        raise InvalidInputError(
            f"Invalid namespace '{value}': must be a UUID or one of {', '.join(NAMESPACES)}"
        ) from e


class Uuid5Generate(Transformer):
    id = "uuid5generate"
    name = "UUID v5 Generate"
    description = "Generate a name-based v5 UUID from 'namespace|name' (namespace: UUID, dns, url, oid or x500)"
    category = TransformerCategory.CRYPTO
    default_test_input = "dns|example.com"

    def transform(self, text: str) -> str:
        namespace, sep, name = text.partition("|")
        if not sep:
            raise InvalidInputError("Input must be in the format 'namespace|name'")
        return str(uuid.uuid5(parse_namespace(namespace), name.strip()))
