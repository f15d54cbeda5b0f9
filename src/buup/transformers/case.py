"""
Identifier case conversions and slugs.

The ``to*case`` family splits its input into words first: on ``-``, ``_``,
``.`` and whitespace when any of them is present, otherwise on case and digit
boundaries (``XMLHttpRequest2`` -> ``XML``, ``Http``, ``Request``, ``2``).
"""

from __future__ import annotations

import re
import unicodedata
from abc import abstractmethod

from buup.transformers.base import Transformer
from buup.types import TransformerCategory

_SEPARATORS = re.compile(r"[-_.\s]")
_CASE_WORDS = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?=[A-Z][a-z]|$)|[0-9]+")


def split_words(text: str) -> list[str]:
    """
    Split an identifier or phrase into words.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    list[str]
        Words in their original case; empty for blank input.
    """
    if not text.strip():
        return []
    if _SEPARATORS.search(text):
        return _SEPARATORS.sub(" ", text).split()
    return _CASE_WORDS.findall(text) or [text]


class _WordCase(Transformer):
    category = TransformerCategory.OTHER
    default_test_input = "hello world example"

    def transform(self, text: str) -> str:
        words = split_words(text)
        if not words:
            return ""
        return self.join(words)

    @abstractmethod
    def join(self, words: list[str]) -> str:
        """Join the split words in this case style."""


class ToCamelCase(_WordCase):
    id = "tocamelcase"
    name = "To camelCase"
    description = "Convert text to camelCase"

    def join(self, words: list[str]) -> str:
        return words[0].lower() + "".join(word.capitalize() for word in words[1:])


class ToPascalCase(_WordCase):
    id = "topascalcase"
    name = "To PascalCase"
    description = "Convert text to PascalCase"

    def join(self, words: list[str]) -> str:
        return "".join(word.capitalize() for word in words)


class ToSnakeCase(_WordCase):
    id = "tosnakecase"
    name = "To snake_case"
    description = "Convert text to snake_case"

    def join(self, words: list[str]) -> str:
        return "_".join(word.lower() for word in words)


class ToKebabCase(_WordCase):
    id = "tokebabcase"
    name = "To kebab-case"
    description = "Convert text to kebab-case"

    def join(self, words: list[str]) -> str:
        return "-".join(word.lower() for word in words)


class ToConstantCase(_WordCase):
    id = "toconstantcase"
    name = "To CONSTANT_CASE"
    description = "Convert text to CONSTANT_CASE"

    def join(self, words: list[str]) -> str:
        return "_".join(word.upper() for word in words)


class CamelToSnake(Transformer):
    """Insert ``_`` before every upper-case letter and lower-case it."""

    id = "cameltosnake"
    name = "CamelCase to Snake Case"
    description = "Convert camelCase or PascalCase to snake_case"
    category = TransformerCategory.OTHER
    default_test_input = "helloWorldExample"

    def transform(self, text: str) -> str:
        if not text:
            return ""
        head, tail = text[0].lower(), text[1:]
        return head + "".join(f"_{char.lower()}" if char.isupper() else char for char in tail)


class SnakeToCamel(Transformer):
    """Drop every ``_`` and upper-case the character that followed it."""

    id = "snaketocamel"
    name = "Snake Case to CamelCase"
    description = "Convert snake_case to camelCase"
    category = TransformerCategory.OTHER
    default_test_input = "hello_world_example"

    def transform(self, text: str) -> str:
        parts = text.split("_")
        return parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])


class Slugify(Transformer):
    id = "slugify"
    name = "Slugify"
    description = "Convert text into a URL-friendly slug (lowercase, dashes, no special characters)"
    category = TransformerCategory.OTHER
    default_test_input = "This is a Test String! 123?"

    def transform(self, text: str) -> str:
        ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
        kept = re.sub(r"[^A-Za-z0-9\s_-]", "", ascii_text).lower()
        return re.sub(r"[\s_-]+", "-", kept).strip("-")
