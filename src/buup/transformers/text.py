"""Plain-text utilities: reversing, statistics and line operations."""

from __future__ import annotations

from buup.transformers.base import Transformer
from buup.types import TransformerCategory

_SENTENCE_TERMINATORS = frozenset(".!?")


def count_sentences(text: str) -> int:
    """
    Count sentences ended by ``.``, ``!`` or ``?``.

    A run of terminators followed by whitespace or the end of the text closes
    one sentence. Non-blank text without any terminator counts as one sentence.
    """
    count = 0
    pending = False
    for char in text:
        if char in _SENTENCE_TERMINATORS:
            pending = True
        elif char.isspace():
            if pending:
                count += 1
                pending = False
        else:
            pending = False
    if pending:
        count += 1
    if count == 0 and text.strip():
        count = 1
    return count


class TextReverse(Transformer):
    id = "textreverse"
    name = "Text Reverse"
    description = "Reverse the input text"
    category = TransformerCategory.OTHER

    def transform(self, text: str) -> str:
        return text[::-1]


class TextStats(Transformer):
    id = "textstats"
    name = "Text Stats"
    description = "Count characters, lines, words and sentences"
    category = TransformerCategory.OTHER
    default_test_input = "Hello world. This is buup!\nIt has two lines."

    def transform(self, text: str) -> str:
        return (
            f"Characters: {len(text)}\n"
            f"Lines: {len(text.splitlines())}\n"
            f"Words: {len(text.split())}\n"
            f"Sentences: {count_sentences(text)}"
        )


class LineSorter(Transformer):
    id = "linesorter"
    name = "Line Sorter"
    description = "Sort lines of text alphabetically (ascending)"
    category = TransformerCategory.OTHER
    default_test_input = "banana\napple\ncherry"

    def transform(self, text: str) -> str:
        return "\n".join(sorted(text.splitlines()))


class UniqueLines(Transformer):
    id = "uniquelines"
    name = "Unique Lines"
    description = "Remove duplicate lines, keeping the first occurrence"
    category = TransformerCategory.OTHER
    default_test_input = "apple\nbanana\napple\ncherry\nbanana"

    def transform(self, text: str) -> str:
        return "\n".join(dict.fromkeys(text.splitlines()))


class WhitespaceRemover(Transformer):
    id = "whitespaceremover"
    name = "Whitespace Remover"
    description = "Remove all whitespace (spaces, tabs, newlines) from the input"
    category = TransformerCategory.OTHER
    default_test_input = "  Remove \t all \n whitespace  "

    def transform(self, text: str) -> str:
        return "".join(text.split())
