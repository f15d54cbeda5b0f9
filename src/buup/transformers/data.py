"""
CSV and JSON table conversions.

``csvtojson`` reads the first row as headers and emits a JSON array of
objects whose values are all strings. ``jsontocsv`` takes a JSON array of
objects, uses every key seen (in first-seen order) as a column, and writes
one row per object.
"""

from __future__ import annotations

import json
import logging
from io import StringIO
from typing import Any

import pandas as pd

from buup.transformers.base import Transformer
from buup.types import InvalidInputError, TransformerCategory

logger = logging.getLogger(__name__)


def read_csv_text(text: str) -> pd.DataFrame:
    """
    Parse CSV text into a dataframe of strings.

    Parameters
    ----------
    text : str
        CSV text whose first non-blank row holds the headers.

    Returns
    -------
    pd.DataFrame
        Dataframe with string cells; missing cells are empty strings. Blank
        header cells are named ``column<N>`` (1-based).

    Raises
    ------
    InvalidInputError
        If the text cannot be parsed as CSV.
    """
    try:
        df = pd.read_csv(
            StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (pd.errors.ParserError, ValueError) as e:
        raise InvalidInputError(f"Failed to parse CSV: {e}") from e

    df.columns = [
        f"column{position}" if str(name).startswith("Unnamed: ") else str(name)
        for position, name in enumerate(df.columns, start=1)
    ]
    return df.fillna("")


def csv_cell(value: Any) -> str:
    """Render one JSON value as a CSV cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


class CsvToJson(Transformer):
    id = "csvtojson"
    name = "CSV to JSON"
    description = "Convert CSV data (first row as headers) to a JSON array of objects"
    category = TransformerCategory.OTHER
    default_test_input = "name,age\nAlice,30\nBob,25"

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        records = read_csv_text(text).to_dict(orient="records")
        return json.dumps(records, indent=2, ensure_ascii=False)


class JsonToCsv(Transformer):
    id = "jsontocsv"
    name = "JSON to CSV"
    description = "Convert a JSON array of objects into CSV format"
    category = TransformerCategory.OTHER
    default_test_input = '[{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]'

    def transform(self, text: str) -> str:
        if not text.strip():
            return ""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"Invalid JSON input: {e}") from e
        if not isinstance(data, list):
            raise InvalidInputError("Input must be a JSON array")

        objects = [item for item in data if isinstance(item, dict)]
        if len(objects) != len(data):
            logger.warning("jsontocsv: skipped %s non-object array items", len(data) - len(objects))
        if not objects:
            return ""

        headers = list(dict.fromkeys(key for item in objects for key in item))
        rows = [[csv_cell(item.get(header)) for header in headers] for item in objects]
        df = pd.DataFrame(rows, columns=headers)
        return df.to_csv(index=False, lineterminator="\n")
