"""CSV output for flattened records.

This module provides the row sink used by the converter.
"""

from __future__ import annotations

import csv
from typing import Sequence, TextIO


class RowWriter:
    """Write CSV rows to a text handle, flushing after every row.

    Quoting and escaping are left to :func:`csv.writer`. Rows are terminated
    with ``"\\n"``.

    Parameters
    ----------
    handle : TextIO
        Output text stream, opened with ``newline=""`` when it is a file.
    delimiter : str, optional
        CSV delimiter (default: ",").
    """

    def __init__(self, handle: TextIO, delimiter: str = ",") -> None:
        self._handle = handle
        self._writer = csv.writer(handle, delimiter=delimiter, lineterminator="\n")
        self.rows_written = 0

    def write_row(self, cells: Sequence[str]) -> None:
        """Write one row and flush it to the handle."""
        self._writer.writerow(cells)
        self.rows_written += 1
        self.flush()

    def flush(self) -> None:
        self._handle.flush()
