"""Core JSON flattening utilities.

This module turns decoded JSON objects into flat dictionaries of CSV cell
strings. Nested objects collapse into dot-delimited keys; every other value
is rendered to a single string by :func:`stringify_value`.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict, Mapping

SEP = "."


def format_number(value: int | float) -> str:
    """Render a number with minimal digits in fixed notation.

    Parameters
    ----------
    value : int | float
        Decoded JSON number.

    Returns
    -------
    str
        Shortest round-trip decimal text without exponent or trailing zeros.

    Examples
    --------
    >>> format_number(0.5)
    '0.5'
    >>> format_number(1.0)
    '1'
    >>> format_number(1e21)
    '1000000000000000000000'
    """
    if isinstance(value, int):
        return str(value)
    # repr() gives the shortest round-trip digits; Decimal expands the exponent.
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def stringify_value(value: Any) -> str:
    """Convert a single decoded JSON value into its CSV cell string.

    Parameters
    ----------
    value : Any
        A decoded JSON value other than an object.

    Returns
    -------
    str
        ``"null"`` for None, strings verbatim, numbers via
        :func:`format_number`, and compact JSON text for booleans, arrays and
        anything else.

    Examples
    --------
    >>> stringify_value(None)
    'null'
    >>> stringify_value(["a", 1, None])
    '["a",1,null]'
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    # bool is an int subclass and must stay JSON text ("true"/"false").
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return to_json_text(value)


def to_json_text(value: Any) -> str:
    """Serialize *value* as compact JSON text.

    Numbers follow :func:`format_number` and object keys are sorted, so an
    array cell renders its numbers the same way scalar cells do.

    Examples
    --------
    >>> to_json_text([1.0, 2.5, {"b": 1, "a": None}])
    '[1,2.5,{"a":null,"b":1}]'
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    if isinstance(value, Mapping):
        members = (
            f"{json.dumps(str(key), ensure_ascii=False)}:{to_json_text(item)}"
            for key, item in sorted(value.items(), key=lambda pair: str(pair[0]))
        )
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(to_json_text(item) for item in value) + "]"
    return json.dumps(value, ensure_ascii=False)


def flatten_record(
    record: Mapping[str, Any],
    dest: Dict[str, str],
    prefix: str = "",
    lowercase: bool = False,
) -> None:
    """Flatten *record* into *dest* in place.

    Keys of nested objects are joined to their parent key with ``"."``. When
    two source paths compose to the same output key, the last one visited
    wins.

    Parameters
    ----------
    record : Mapping[str, Any]
        Decoded JSON object.
    dest : Dict[str, str]
        Map receiving ``column -> cell`` entries.
    prefix : str, optional
        Key of the enclosing object (used internally during recursion).
    lowercase : bool, optional
        Lowercase every composed key (default: False).
    """
    for key, value in record.items():
        out_key = f"{prefix}{SEP}{key}" if prefix else str(key)
        if lowercase:
            out_key = out_key.lower()

        if isinstance(value, Mapping):
            flatten_record(value, dest, out_key, lowercase)
        else:
            dest[out_key] = stringify_value(value)


def flatten_json(record: Mapping[str, Any], lowercase: bool = False) -> Dict[str, str]:
    """Flatten a JSON object into a new dictionary of cell strings.

    Examples
    --------
    >>> flatten_json({"a": "x", "b": {"c": 1}})
    {'a': 'x', 'b.c': '1'}
    """
    items: Dict[str, str] = {}
    flatten_record(record, items, lowercase=lowercase)
    return items
