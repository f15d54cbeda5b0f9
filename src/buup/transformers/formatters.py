"""
Formatters and minifiers for structured text.

JSON and XML are parsed before being re-serialized, so malformed input is
rejected rather than passed through. SQL, JavaScript and Markdown are handled
by their dedicated libraries.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as StdET  # noqa: N813

import defusedxml.ElementTree as ET
import jsbeautifier
import markdown
import markdownify
import rjsmin
import sqlparse
from defusedxml import DefusedXmlException

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory


_LINE_NUMBER_PREFIX = re.compile(r"^\s*\d+[\s.:)\-]*")


def _load_json(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON input: {e}") from e


def _parse_xml(text: str) -> StdET.Element:
    """Parse XML safely and drop whitespace-only text nodes."""
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, DefusedXmlException) as e:
        raise InvalidInputError(f"Invalid XML input: {e}") from e

    for element in root.iter():
        if element.text is not None and not element.text.strip():
            element.text = None
        if element.tail is not None and not element.tail.strip():
            element.tail = None
    return root


def _split_lines(text: str) -> tuple[list[str], bool]:
    """Split into lines, reporting whether the text ended with a newline."""
    return text.splitlines(), text.endswith(("\n", "\r"))


def _join_lines(lines: list[str], trailing_newline: bool) -> str:
    joined = "\n".join(lines)
    return joined + "\n" if trailing_newline else joined


class JsonFormat(Transformer):
    id = "jsonformat"
    name = "JSON Format"
    description = "Format JSON with 2-space indentation"
    category = TransformerCategory.FORMATTER
    default_test_input = '{"name":"buup","tags":["text","tools"],"version":1}'

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return json.dumps(_load_json(text), indent=2, ensure_ascii=False)


class JsonMinify(Transformer):
    id = "jsonminify"
    name = "JSON Minify"
    description = "Minify JSON by removing whitespace"
    category = TransformerCategory.FORMATTER
    default_test_input = '{\n  "name": "buup",\n  "tags": [\n    "text",\n    "tools"\n  ]\n}'

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return json.dumps(_load_json(text), separators=(",", ":"), ensure_ascii=False)


class XmlFormat(Transformer):
    id = "xmlformat"
    name = "XML Format"
    description = "Format XML with proper indentation"
    category = TransformerCategory.FORMATTER
    default_test_input = '<root><item id="1">One</item><item id="2">Two</item></root>'

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        root = _parse_xml(text)
        StdET.indent(root, space="  ")
        return StdET.tostring(root, encoding="unicode")


class XmlMinify(Transformer):
    id = "xmlminify"
    name = "XML Minify"
    description = "Compress XML by removing whitespace between elements"
    category = TransformerCategory.FORMATTER
    default_test_input = '<root>\n  <item id="1">One</item>\n  <item id="2">Two</item>\n</root>'

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return StdET.tostring(_parse_xml(text), encoding="unicode")


class SqlFormat(Transformer):
    id = "sqlformat"
    name = "SQL Format"
    description = "Format SQL queries with indentation and upper-case keywords"
    category = TransformerCategory.FORMATTER
    default_test_input = "select id, name from users where active = 1 order by name"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return sqlparse.format(text, reindent=True, keyword_case="upper").strip()


class SqlMinify(Transformer):
    id = "sqlminify"
    name = "SQL Minify"
    description = "Minify SQL queries by removing comments and extra whitespace"
    category = TransformerCategory.FORMATTER
    default_test_input = "SELECT id,\n       name\nFROM users -- active only\nWHERE active = 1"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return sqlparse.format(text, strip_comments=True, strip_whitespace=True).strip()


class JsFormat(Transformer):
    id = "jsformat"
    name = "JavaScript Format"
    description = "Format JavaScript code with indentation and spacing"
    category = TransformerCategory.FORMATTER
    default_test_input = "function hello(name){if(name){return 'Hello '+name;}return 'Hello';}"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return jsbeautifier.beautify(text)


class JsMinify(Transformer):
    id = "jsminify"
    name = "JavaScript Minify"
    description = "Minify JavaScript by removing whitespace and comments"
    category = TransformerCategory.FORMATTER
    default_test_input = "function hello(name) {\n    // greet\n    return 'Hello ' + name;\n}"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return rjsmin.jsmin(text).strip()


class MarkdownToHtml(Transformer):
    id = "markdowntohtml"
    name = "Markdown to HTML"
    description = "Convert Markdown text to HTML"
    category = TransformerCategory.FORMATTER
    default_test_input = "# Title\n\nSome **bold** and *italic* text.\n\n- one\n- two"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return markdown.markdown(text, extensions=["fenced_code", "tables"])


class HtmlToMarkdown(Transformer):
    id = "htmltomarkdown"
    name = "HTML to Markdown"
    description = "Convert HTML to Markdown"
    category = TransformerCategory.FORMATTER
    default_test_input = "<h1>Title</h1><p>Some <strong>bold</strong> text.</p>"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        return markdownify.markdownify(text, heading_style="ATX").strip()


class LineNumberAdder(Transformer):
    id = "linenumberadder"
    name = "Line Number Adder"
    description = "Add 1-based line numbers to the beginning of each line"
    category = TransformerCategory.FORMATTER
    default_test_input = "first line\nsecond line\nthird line"

    def transform(self, text: str) -> str:
        if not text:
            return ""
        lines, trailing = _split_lines(text)
        return _join_lines([f"{n} {line}" for n, line in enumerate(lines, start=1)], trailing)


class LineNumberRemover(Transformer):
    id = "linenumberremover"
    name = "Line Number Remover"
    description = "Remove leading line numbers and their delimiters from each line"
    category = TransformerCategory.FORMATTER
    default_test_input = "1. first line\n2: second line\n3) third line"

    def transform(self, text: str) -> str:
        if not text:
            return ""
        lines, trailing = _split_lines(text)
        stripped = [_LINE_NUMBER_PREFIX.sub("", line, count=1) for line in lines]
        return _join_lines(stripped, trailing)
