"""Streaming JSON to CSV conversion.

:func:`convert` resolves the output columns, writes the header row and then
one row per record: first the records consumed during column resolution,
then the rest of the stream as it is decoded.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, TextIO, Tuple

from .columns import ColumnResolution, resolve_columns
from .csv_io import RowWriter
from .decoder import JSONSource
from .flattener import flatten_json


@dataclass(frozen=True)
class Options:
    """Switches controlling how records are converted.

    Attributes
    ----------
    columns : Tuple[str, ...]
        Explicit output columns. Empty means discover them from the input.
    scan_all : bool
        Discover columns from every record rather than the first one.
    lowercase_keys : bool
        Lowercase flattened column names.
    columns_only : bool
        Print the resolved columns instead of converting.
    """
    columns: Tuple[str, ...] = ()
    scan_all: bool = True
    lowercase_keys: bool = True
    columns_only: bool = False


def build_row(columns: Sequence[str], flat: Mapping[str, str]) -> List[str]:
    """Return the cells of *flat* in column order, ``""`` for missing keys."""
    return [flat.get(name, "") for name in columns]


def convert(
    source: JSONSource,
    sink: RowWriter,
    options: Options,
    aux: Optional[TextIO] = None,
    resolution: Optional[ColumnResolution] = None,
) -> int:
    """Convert every record of *source* into a CSV row on *sink*.

    Parameters
    ----------
    source : JSONSource
        Record source, positioned at its start.
    sink : RowWriter
        CSV row sink.
    options : Options
        Conversion options.
    aux : Optional[TextIO], optional
        Stream for the column listing in ``columns_only`` mode
        (default: ``sys.stdout``).
    resolution : Optional[ColumnResolution], optional
        Columns resolved beforehand with :func:`resolve_columns`.

    Returns
    -------
    int
        Number of data rows written (the header is not counted).

    Raises
    ------
    DecodeError
        If the input is malformed. Rows written before the error remain.
    """
    if resolution is None:
        resolution = resolve_columns(source, options)
    if resolution is None:
        return 0

    columns = resolution.columns
    if options.columns_only:
        out = aux if aux is not None else sys.stdout
        for name in columns:
            print(name, file=out)
        return 0

    sink.write_row(columns)

    rows = 0
    for record in resolution.pending:
        _emit(sink, columns, record, options)
        rows += 1
    resolution.pending.clear()

    for record in source:
        _emit(sink, columns, record, options)
        rows += 1

    sink.flush()
    return rows


def _emit(sink: RowWriter, columns: Sequence[str], record: Dict[str, Any], options: Options) -> None:
    flat = flatten_json(record, lowercase=options.lowercase_keys)
    sink.write_row(build_row(columns, flat))
