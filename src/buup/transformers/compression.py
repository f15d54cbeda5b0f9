"""
DEFLATE and Gzip compression.

Compressed bytes are carried as Base64 text so they can round-trip through a
text box. Gzip output uses a zero modification time, which keeps it
deterministic.
"""

from __future__ import annotations

import base64
import binascii
import gzip
import zlib

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory

# Negative window bits select a raw RFC 1951 stream without zlib framing.
_RAW_DEFLATE_WBITS = -zlib.MAX_WBITS


def deflate(data: bytes) -> bytes:
    """Compress ``data`` as a raw DEFLATE stream."""
    compressor = zlib.compressobj(level=9, wbits=_RAW_DEFLATE_WBITS)
    return compressor.compress(data) + compressor.flush()


def inflate(data: bytes) -> bytes:
    """Decompress a raw DEFLATE stream."""
    decompressor = zlib.decompressobj(wbits=_RAW_DEFLATE_WBITS)
    result = decompressor.decompress(data) + decompressor.flush()
    if not decompressor.eof:
        raise zlib.error("incomplete DEFLATE stream")
    return result


def _decode_payload(text: str) -> bytes:
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError("Compressed input must be valid Base64") from e


def _to_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Decompressed data is not valid UTF-8: {e}") from e


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class DeflateCompress(Transformer):
    id = "deflatecompress"
    name = "DEFLATE Compress"
    description = "Compress input with DEFLATE (RFC 1951) and encode the output as Base64"
    category = TransformerCategory.COMPRESSION

    def transform(self, text: str) -> str:
        if not text:
            return ""
        return _b64(deflate(text.encode("utf-8")))


class DeflateDecompress(Transformer):
    id = "deflatedecompress"
    name = "DEFLATE Decompress"
    description = "Decompress Base64-encoded DEFLATE (RFC 1951) input"
    category = TransformerCategory.COMPRESSION
    default_test_input = _b64(deflate(b"Hello, World!"))

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        try:
            data = inflate(_decode_payload(text))
        except zlib.error as e:
            raise InvalidInputError(f"DEFLATE decompression failed: {e}") from e
        return _to_text(data)


class GzipCompress(Transformer):
    id = "gzipcompress"
    name = "Gzip Compress"
    description = "Compress input with Gzip (RFC 1952) and encode the output as Base64"
    category = TransformerCategory.COMPRESSION

    def transform(self, text: str) -> str:
        if not text:
            return ""
        return _b64(gzip.compress(text.encode("utf-8"), mtime=0))


class GzipDecompress(Transformer):
    id = "gzipdecompress"
    name = "Gzip Decompress"
    description = "Decompress Base64-encoded Gzip (RFC 1952) input"
    category = TransformerCategory.COMPRESSION
    default_test_input = _b64(gzip.compress(b"Hello, World!", mtime=0))

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        try:
            data = gzip.decompress(_decode_payload(text))
        except (OSError, EOFError, zlib.error) as e:
            raise InvalidInputError(f"Gzip decompression failed: {e}") from e
        return _to_text(data)
