"""Column resolution for CSV output.

The output columns come from one of three places:

- an explicit list given by the caller, used as-is;
- the keys of the first record (``scan_all=False``);
- the union of keys across every record (``scan_all=True``).

A full scan consumes the input. When the source can seek, it is rewound
afterwards; otherwise every scanned record is kept in
:attr:`ColumnResolution.pending` so it can still be emitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set

from .flattener import flatten_json

if TYPE_CHECKING:
    from .converter import Options
    from .decoder import JSONSource

EXPLICIT = "explicit"
FIRST_RECORD = "first-record"
RESCAN = "rescan"
BUFFERED = "buffered"


@dataclass
class ColumnResolution:
    """Resolved output columns plus records already consumed from the source.

    Attributes
    ----------
    columns : List[str]
        Output column names, in output order.
    pending : List[Dict[str, Any]]
        Decoded records that must be emitted before reading further input.
    strategy : str
        How the columns were obtained: ``explicit``, ``first-record``,
        ``rescan`` or ``buffered``.
    """
    columns: List[str]
    pending: List[Dict[str, Any]] = field(default_factory=list)
    strategy: str = EXPLICIT


def resolve_columns(source: "JSONSource", options: "Options") -> Optional[ColumnResolution]:
    """Determine the output columns before any row is written.

    Parameters
    ----------
    source : JSONSource
        Record source, positioned at its start.
    options : Options
        Conversion options.

    Returns
    -------
    Optional[ColumnResolution]
        None when columns must be discovered from the first record and the
        input holds no records at all.

    Raises
    ------
    DecodeError
        If the input is malformed while scanning.
    """
    if options.columns:
        return ColumnResolution(list(options.columns))

    if not options.scan_all:
        record = next(source, None)
        if record is None:
            return None
        keys = flatten_json(record, lowercase=options.lowercase_keys)
        return ColumnResolution(sorted(keys), [record], FIRST_RECORD)

    rewindable = source.supports_rewind()
    seen: Set[str] = set()
    pending: List[Dict[str, Any]] = []
    for record in source:
        seen.update(flatten_json(record, lowercase=options.lowercase_keys))
        if not rewindable:
            pending.append(record)

    if rewindable:
        source.rewind()
        return ColumnResolution(sorted(seen), strategy=RESCAN)
    return ColumnResolution(sorted(seen), pending, BUFFERED)
