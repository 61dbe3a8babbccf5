"""Streaming JSON record source.

:class:`JSONSource` reads JSON objects one at a time from a binary stream.
The stream may hold newline-delimited or concatenated objects, or a single
top-level array whose elements are the records. Parsing is delegated to
``ijson`` so only one record is held in memory at a time.
"""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Dict, Iterator, Optional

import ijson

from .errors import DecodeError

JSON_WHITESPACE = b" \t\r\n"

_OPENING = ("start_map", "start_array")
_CLOSING = ("end_map", "end_array")


class _AvailableReader:
    """Expose ``read1`` as ``read`` so the parser sees data as soon as it arrives."""

    def __init__(self, stream: io.BufferedReader) -> None:
        self._stream = stream

    def read(self, size: int = -1) -> bytes:
        return self._stream.read1(size)


class JSONSource:
    """Iterator over the JSON objects of a binary stream.

    Iteration ends cleanly (``StopIteration``) at end of input. Malformed
    JSON and top-level values that are not objects raise
    :class:`~json2csv.errors.DecodeError`. A top-level array is only
    accepted as the first and only value of the input.

    Parameters
    ----------
    stream : BinaryIO
        Binary input. Streams without ``peek`` are wrapped in
        :class:`io.BufferedReader`.
    """

    def __init__(self, stream: BinaryIO) -> None:
        if not hasattr(stream, "peek"):
            stream = io.BufferedReader(stream)  # type: ignore[arg-type]
        self._stream = stream
        self._items: Optional[Iterator[Any]] = None

    def supports_rewind(self) -> bool:
        """Return True if the stream can seek back to its start."""
        return self._stream.seekable()

    def rewind(self) -> None:
        """Seek to the start of the stream and restart parsing."""
        self._stream.seek(0)
        self._items = None

    def __iter__(self) -> "JSONSource":
        return self

    def __next__(self) -> Dict[str, Any]:
        if self._items is None:
            self._items = self._open_items()
        try:
            value = next(self._items)
        except (ijson.JSONError, UnicodeDecodeError) as exc:
            raise DecodeError(str(exc)) from exc
        if not isinstance(value, dict):
            raise DecodeError(
                f"expected a JSON object, got {type(value).__name__}: {value!r:.40}"
            )
        return value

    def _open_items(self) -> Iterator[Any]:
        if not self._skip_whitespace():
            return iter(())
        events = ijson.parse(
            _AvailableReader(self._stream), multiple_values=True, use_float=True
        )
        return _build_records(events)

    def _skip_whitespace(self) -> bytes:
        """Consume leading whitespace and return the next byte without consuming it."""
        while True:
            chunk = self._stream.peek(1)
            if not chunk:
                return b""
            stripped = chunk.lstrip(JSON_WHITESPACE)
            skipped = len(chunk) - len(stripped)
            if skipped:
                self._stream.read(skipped)
            if stripped:
                return stripped[:1]


def _build_records(events: Iterator[Any]) -> Iterator[Any]:
    """Assemble parser events into record values.

    Records are the top-level values, or the elements of the array when the
    input opens with one. Nothing may follow such an array.
    """
    base = depth = 0
    first = True
    array_closed = False
    builder: Optional[ijson.ObjectBuilder] = None

    for _, event, value in events:
        if builder is None:
            if depth == 0:
                if array_closed:
                    raise DecodeError("unexpected JSON value after the top-level array")
                if first and event == "start_array":
                    first = False
                    base = depth = 1
                    continue
                first = False
            elif event == "end_array" and depth == base:
                base = depth = 0
                array_closed = True
                continue
            builder = ijson.ObjectBuilder()

        builder.event(event, value)
        if event in _OPENING:
            depth += 1
        elif event in _CLOSING:
            depth -= 1
        if depth == base:
            yield builder.value
            builder = None
