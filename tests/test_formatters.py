"""Tests for the formatters and minifiers."""
# ruff: noqa: S101
# pylint: disable=import-error

from __future__ import annotations

import pytest

from buup.registry import get_transformer
from buup.types import InvalidInputError


def run(transformer_id: str, text: str) -> str:
    return get_transformer(transformer_id).transform(text)


def test_json_format() -> None:
    """JSON is pretty printed with two spaces."""
    assert run("jsonformat", '{"a":1,"b":[true,null]}') == '{\n  "a": 1,\n  "b": [\n    true,\n    null\n  ]\n}'


def test_json_empty_and_blank() -> None:
    """Empty or whitespace-only input yields empty output."""
    assert run("jsonformat", "") == ""
    assert run("jsonformat", "  \n") == ""
    assert run("jsonminify", "   ") == ""


def test_json_minify_idempotent() -> None:
    """Minifying twice equals minifying once."""
    pretty = '{\n  "name": "buup",\n  "nested": {"x": [1, 2, 3]}\n}'
    once = run("jsonminify", pretty)
    assert once == '{"name":"buup","nested":{"x":[1,2,3]}}'
    assert run("jsonminify", once) == once


def test_json_keeps_unicode() -> None:
    """Non-ASCII characters are not escaped."""
    assert run("jsonminify", '{"city": "Zürich"}') == '{"city":"Zürich"}'


@pytest.mark.parametrize("transformer_id", ["jsonformat", "jsonminify"])
def test_json_invalid(transformer_id: str) -> None:
    """Unbalanced JSON is rejected."""
    with pytest.raises(InvalidInputError, match="Invalid JSON input"):
        run(transformer_id, '{"a": [1, 2}')


def test_xml_format_and_minify() -> None:
    """XML is indented with two spaces and minified without inter-element whitespace."""
    minified = '<root><item id="1">One</item><item id="2">Two</item></root>'
    formatted = run("xmlformat", minified)
    assert formatted == '<root>\n  <item id="1">One</item>\n  <item id="2">Two</item>\n</root>'
    assert run("xmlminify", formatted) == minified


def test_xml_invalid() -> None:
    """Malformed XML is rejected."""
    with pytest.raises(InvalidInputError, match="Invalid XML input"):
        run("xmlformat", "<root><item></root>")


def test_xml_rejects_entity_expansion() -> None:
    """Entity declarations are refused by the safe parser."""
    payload = '<!DOCTYPE r [<!ENTITY a "aaaa">]><r>&a;</r>'
    with pytest.raises(InvalidInputError):
        run("xmlminify", payload)


def test_sql_format() -> None:
    """SQL keywords are upper-cased and clauses start new lines."""
    formatted = run("sqlformat", "select id, name from users where active = 1")
    assert formatted.startswith("SELECT id")
    assert "\nFROM users" in formatted
    assert "\nWHERE active = 1" in formatted


def test_sql_minify() -> None:
    """Comments and extra whitespace are removed."""
    minified = run("sqlminify", "SELECT id,\n       name\nFROM users -- active only\nWHERE active = 1")
    assert "--" not in minified
    assert "\n" not in minified
    assert "FROM users" in minified
    assert run("sqlminify", minified) == minified


def test_js_format_and_minify() -> None:
    """JavaScript is beautified and minified."""
    formatted = run("jsformat", "function f(a){return a+1;}")
    assert "function f(a) {" in formatted
    assert "\n" in formatted
    minified = run("jsminify", "function f(a) {\n    // comment\n    return a + 1;\n}")
    assert "comment" not in minified
    assert "\n" not in minified
    assert run("jsminify", minified) == minified


def test_markdown_to_html() -> None:
    """Markdown headings and emphasis become HTML."""
    html = run("markdowntohtml", "# Title\n\nSome **bold** text.")
    assert "<h1>Title</h1>" in html
    assert "<strong>bold</strong>" in html


def test_html_to_markdown() -> None:
    """HTML headings use ATX style."""
    markdown = run("htmltomarkdown", "<h1>Title</h1><p>Some <strong>bold</strong> text.</p>")
    assert markdown.startswith("# Title")
    assert "**bold**" in markdown


def test_line_numbers() -> None:
    """Line numbers are added 1-based and removed with their delimiters."""
    assert run("linenumberadder", "a\nb\n") == "1 a\n2 b\n"
    assert run("linenumberremover", "1. a\n2: b\n  3) c\n4 - d") == "a\nb\nc\nd"
    assert run("linenumberadder", "") == ""
