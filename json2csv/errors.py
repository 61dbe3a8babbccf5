"""Exceptions raised while converting JSON records to CSV."""

from __future__ import annotations


class Json2CsvError(Exception):
    """Base class for conversion failures reported to the user."""


class OpenError(Json2CsvError):
    """An input or output path could not be opened."""


class DecodeError(Json2CsvError):
    """The input stream contains malformed JSON or a non-object record."""
