"""
Number base conversions.

Inputs are trimmed; blank input yields blank output. Values are arbitrary
precision integers and keep their sign in every base, so ``-255`` becomes
``-FF`` and back. Hexadecimal output is upper-case.
"""

from __future__ import annotations

import re

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_DIGITS = {
    2: (re.compile(r"[01]+"), "binary"),
    8: (re.compile(r"[0-7]+"), "octal"),
    16: (re.compile(r"[0-9A-Fa-f]+"), "hexadecimal"),
}
_PREFIXES = {2: ("0b", "0B"), 8: ("0o", "0O"), 16: ("0x", "0X")}


def parse_decimal(text: str) -> int:
    """
    Parse a signed decimal integer.

    A ``0x`` prefixed value is accepted as hexadecimal.

    Parameters
    ----------
    text : str
        Trimmed input.

    Returns
    -------
    int
        Parsed value.

    Raises
    ------
    InvalidInputError
        If the text is not an integer.
    """
    if text[:2] in _PREFIXES[16] and _DIGITS[16][0].fullmatch(text[2:]):
        return int(text[2:], 16)
    if not _DECIMAL.fullmatch(text):
        raise InvalidInputError(f"Invalid decimal number: '{text}'")
    return int(text)


def parse_based(text: str, base: int) -> int:
    """
    Parse an integer in ``base`` (2, 8 or 16).

    A leading ``-`` may precede the optional radix prefix (``0b``, ``0o``,
    ``0x``); inner whitespace is ignored. This reads back the output of
    ``format_int``.
    """
    sign = 1
    digits = text
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]
    if digits[:2] in _PREFIXES[base]:
        digits = digits[2:]
    cleaned = "".join(digits.split())
    pattern, label = _DIGITS[base]
    if not pattern.fullmatch(cleaned):
        raise InvalidInputError(f"Invalid {label} number: '{text}'")
    return sign * int(cleaned, base)


def format_int(value: int, format_spec: str) -> str:
    """Format ``value`` with the ``format`` type ``format_spec``, keeping a leading minus sign."""
    sign = "-" if value < 0 else ""
    return sign + format(abs(value), format_spec)


class _BaseConversion(Transformer):
    """Shared flow: trim, parse in the source base, format in the target base."""

    source_base: int = 10
    target_format: str = "d"

    def transform(self, text: str) -> str:
        text = text.strip()
        if not text:
            return ""
        if self.source_base == 10:
            value = parse_decimal(text)
        else:
            value = parse_based(text, self.source_base)
        return format_int(value, self.target_format)


class DecimalToBinary(_BaseConversion):
    id = "decimaltobinary"
    name = "Decimal to Binary"
    description = "Convert decimal number to binary"
    category = TransformerCategory.ENCODER
    default_test_input = "42"
    target_format = "b"


class BinaryToDecimal(_BaseConversion):
    id = "binarytodecimal"
    name = "Binary to Decimal"
    description = "Convert binary number to decimal"
    category = TransformerCategory.DECODER
    default_test_input = "101010"
    source_base = 2


class DecimalToHex(_BaseConversion):
    id = "decimaltohex"
    name = "Decimal to Hex"
    description = "Convert decimal number to hexadecimal"
    category = TransformerCategory.ENCODER
    default_test_input = "255"
    target_format = "X"


class HexToDecimal(_BaseConversion):
    id = "hextodecimal"
    name = "Hex to Decimal"
    description = "Convert hexadecimal number to decimal"
    category = TransformerCategory.DECODER
    default_test_input = "FF"
    source_base = 16


class DecimalToOctal(_BaseConversion):
    id = "decimaltooctal"
    name = "Decimal to Octal"
    description = "Convert decimal number to octal"
    category = TransformerCategory.ENCODER
    default_test_input = "64"
    target_format = "o"


class OctalToDecimal(_BaseConversion):
    id = "octaltodecimal"
    name = "Octal to Decimal"
    description = "Convert octal number to decimal"
    category = TransformerCategory.DECODER
    default_test_input = "100"
    source_base = 8


class BinaryToHex(_BaseConversion):
    id = "binarytohex"
    name = "Binary to Hex"
    description = "Convert binary number to hexadecimal"
    category = TransformerCategory.ENCODER
    default_test_input = "11111111"
    source_base = 2
    target_format = "X"


class HexToBinary(_BaseConversion):
    id = "hextobinary"
    name = "Hex to Binary"
    description = "Convert hexadecimal number to binary"
    category = TransformerCategory.ENCODER
    default_test_input = "FF"
    source_base = 16
    target_format = "b"
