"""Streaming JSON to CSV conversion.

This package flattens nested JSON objects into dotted column names,
discovers the output columns from the input when none are given, and writes
one CSV row per record as the input is decoded.
"""

from .columns import ColumnResolution, resolve_columns
from .converter import Options, convert
from .csv_io import RowWriter
from .decoder import JSONSource
from .errors import DecodeError, Json2CsvError, OpenError
from .flattener import flatten_json, flatten_record, stringify_value, to_json_text

__all__ = [
    "ColumnResolution",
    "DecodeError",
    "JSONSource",
    "Json2CsvError",
    "OpenError",
    "Options",
    "RowWriter",
    "convert",
    "flatten_json",
    "flatten_record",
    "resolve_columns",
    "stringify_value",
    "to_json_text",
]
