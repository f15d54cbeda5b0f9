"""
Encoders and decoders.

Byte-oriented encoders work on the UTF-8 encoding of the input. Decoders
reject malformed input with ``InvalidInputError`` and require the decoded
bytes to be valid UTF-8 text.
"""

from __future__ import annotations

import base64
import binascii
import html
import json
import re
import string
from urllib.parse import quote, unquote

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory

_MALFORMED_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

_MORSE_CODE = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
    " ": "/",
}
_MORSE_DECODE = {code: char for char, code in _MORSE_CODE.items()}

_ROT13 = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_lowercase[13:]
    + string.ascii_lowercase[:13]
    + string.ascii_uppercase[13:]
    + string.ascii_uppercase[:13],
)


def _utf8(data: bytes, what: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Invalid UTF-8 in decoded {what}: {e}") from e


def _b64decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError("Invalid Base64 input") from e


def _hex_bytes(text: str) -> bytes:
    if len(text) % 2 != 0:
        raise InvalidInputError("Hex string must have an even length")
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise InvalidInputError(f"Invalid hex input: {e}") from e


def _b64url_decode(segment: str, part: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    try:
        return base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(f"Invalid Base64url in JWT {part}") from e


class Base64Encode(Transformer):
    id = "base64encode"
    name = "Base64 Encode"
    description = "Encode text to Base64 format"
    category = TransformerCategory.ENCODER

    def transform(self, text: str) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")


class Base64Decode(Transformer):
    id = "base64decode"
    name = "Base64 Decode"
    description = "Decode Base64 text to plain text"
    category = TransformerCategory.DECODER
    default_test_input = "SGVsbG8sIFdvcmxkIQ=="

    def transform(self, text: str) -> str:
        text = text.strip()
        if not text:
            return ""
        return _utf8(_b64decode(text), "Base64 data")


class UrlEncode(Transformer):
    id = "urlencode"
    name = "URL Encode"
    description = "Encode text for use in URLs"
    category = TransformerCategory.ENCODER
    default_test_input = "Hello, world!"

    def transform(self, text: str) -> str:
        if not text.strip():
            return text
        # Only letters, digits and "-_." stay unescaped.
        return quote(text, safe="").replace("~", "%7E")


class UrlDecode(Transformer):
    id = "urldecode"
    name = "URL Decode"
    description = "Decode URL-encoded text to plain text"
    category = TransformerCategory.DECODER
    default_test_input = "Hello%2C%20world%21"

    def transform(self, text: str) -> str:
        if not text:
            return ""
        if _MALFORMED_PERCENT.search(text):
            raise InvalidInputError("Invalid URL-encoded input: malformed percent escape")
        try:
            return unquote(text, errors="strict")
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Invalid URL-encoded input: {e}") from e


class HtmlEncode(Transformer):
    id = "htmlencode"
    name = "HTML Encode"
    description = "Convert special characters to HTML entities"
    category = TransformerCategory.ENCODER
    default_test_input = "<p>Hello & Welcome!</p>"

    def transform(self, text: str) -> str:
        return text.translate(_HTML_ESCAPES)


class HtmlDecode(Transformer):
    id = "htmldecode"
    name = "HTML Decode"
    description = "Convert HTML entities to special characters"
    category = TransformerCategory.DECODER
    default_test_input = "&lt;p&gt;Hello &amp; Welcome!&lt;/p&gt;"

    def transform(self, text: str) -> str:
        return html.unescape(text)


class HexEncode(Transformer):
    id = "hexencode"
    name = "Hex Encode"
    description = "Encode text to hexadecimal representation"
    category = TransformerCategory.ENCODER

    def transform(self, text: str) -> str:
        return text.encode("utf-8").hex()


class HexDecode(Transformer):
    id = "hexdecode"
    name = "Hex Decode"
    description = "Decode a hexadecimal string back to UTF-8 text"
    category = TransformerCategory.DECODER
    default_test_input = "48656c6c6f2c20576f726c6421"

    def transform(self, text: str) -> str:
        cleaned = "".join(text.split())
        if not cleaned:
            return ""
        return _utf8(_hex_bytes(cleaned), "hex data")


class Base64ToHex(Transformer):
    id = "base64tohex"
    name = "Base64 to Hex"
    description = "Convert Base64 encoded data to hexadecimal"
    category = TransformerCategory.DECODER
    default_test_input = "SGVsbG8="

    def transform(self, text: str) -> str:
        text = text.strip()
        if not text:
            return ""
        return _b64decode(text).hex().upper()


class HexToBase64(Transformer):
    id = "hextobase64"
    name = "Hex to Base64"
    description = "Convert hexadecimal data to Base64"
    category = TransformerCategory.ENCODER
    default_test_input = "48656C6C6F"

    def transform(self, text: str) -> str:
        cleaned = "".join(text.split())
        if not cleaned:
            return ""
        return base64.b64encode(_hex_bytes(cleaned)).decode("ascii")


class BinaryEncode(Transformer):
    id = "binaryencode"
    name = "Binary Encode"
    description = "Encode text into its binary representation (space-separated bytes)"
    category = TransformerCategory.ENCODER
    default_test_input = "Hi"

    def transform(self, text: str) -> str:
        return " ".join(f"{byte:08b}" for byte in text.encode("utf-8"))


class BinaryDecode(Transformer):
    id = "binarydecode"
    name = "Binary Decode"
    description = "Decode space-separated 8-bit groups back to text"
    category = TransformerCategory.DECODER
    default_test_input = "01001000 01101001"

    def transform(self, text: str) -> str:
        chunks = text.split()
        for chunk in chunks:
            if len(chunk) != 8 or set(chunk) - {"0", "1"}:
                raise InvalidInputError(f"Invalid 8-bit binary chunk: '{chunk}'")
        return _utf8(bytes(int(chunk, 2) for chunk in chunks), "binary data")


class AsciiToHex(Transformer):
    id = "asciitohex"
    name = "ASCII to Hex"
    description = "Convert ASCII characters to their hexadecimal representation"
    category = TransformerCategory.ENCODER
    default_test_input = "Hello"

    def transform(self, text: str) -> str:
        try:
            return text.encode("ascii").hex()
        except UnicodeEncodeError as e:
            raise InvalidInputError(f"Input contains non-ASCII characters: {e}") from e


class HexToAscii(Transformer):
    id = "hextoascii"
    name = "Hex to ASCII"
    description = "Convert hexadecimal representation back to ASCII characters"
    category = TransformerCategory.DECODER
    default_test_input = "48656c6c6f"

    def transform(self, text: str) -> str:
        cleaned = text.strip()
        if cleaned[:2].lower() == "0x":
            cleaned = cleaned[2:]
        cleaned = "".join(cleaned.split())
        data = _hex_bytes(cleaned)
        try:
            return data.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Decoded bytes are not ASCII: {e}") from e


class MorseEncode(Transformer):
    id = "morseencode"
    name = "Morse Encode"
    description = "Encode text to Morse code (letters are upper-cased)"
    category = TransformerCategory.ENCODER
    default_test_input = "SOS HELP"

    def transform(self, text: str) -> str:
        codes = []
        for char in text.upper():
            code = _MORSE_CODE.get(char)
            if code is None:
                raise InvalidInputError(f"Cannot encode '{char}' to Morse code")
            codes.append(code)
        return " ".join(codes)


class MorseDecode(Transformer):
    id = "morsedecode"
    name = "Morse Decode"
    description = "Decode Morse code into text"
    category = TransformerCategory.DECODER
    default_test_input = "... --- ... / .... . .-.. .--."

    def transform(self, text: str) -> str:
        chars = []
        for code in text.split():
            char = _MORSE_DECODE.get(code)
            if char is None:
                raise InvalidInputError(f"Invalid Morse code sequence: {code}")
            chars.append(char)
        return "".join(chars)


class Rot13(Transformer):
    id = "rot13"
    name = "ROT13 Cipher"
    description = "Applies the ROT13 substitution cipher to the input text"
    category = TransformerCategory.ENCODER

    def transform(self, text: str) -> str:
        return text.translate(_ROT13)


class JwtDecode(Transformer):
    id = "jwtdecode"
    name = "JWT Decode"
    description = "Decode a JSON Web Token without verifying the signature"
    category = TransformerCategory.DECODER
    default_test_input = (
        "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
        ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
        ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
    )

    def transform(self, text: str) -> str:
        text = text.strip()
        if not text:
            return ""
        parts = text.split(".")
        if len(parts) != 3:
            raise InvalidInputError("Invalid JWT token format. Expected format: header.payload.signature")

        decoded = {}
        for part, segment in zip(("header", "payload"), parts[:2], strict=True):
            raw = _utf8(_b64url_decode(segment, part), f"JWT {part}")
            try:
                decoded[part] = json.loads(raw)
            except json.JSONDecodeError as e:
                raise InvalidInputError(f"JWT {part} is not valid JSON: {e}") from e
        decoded["signature"] = parts[2]
        return json.dumps(decoded, indent=2, ensure_ascii=False)
