"""Shared fixtures for the test suite."""

from __future__ import annotations

import io
import os
from typing import BinaryIO, Callable, Iterator, List

import pytest


@pytest.fixture
def seekable() -> Callable[[str], BinaryIO]:
    """Return a factory for rewindable in-memory input streams."""

    def _make(text: str) -> BinaryIO:
        return io.BytesIO(text.encode("utf-8"))

    return _make


@pytest.fixture
def pipe() -> Iterator[Callable[[str], BinaryIO]]:
    """Return a factory for non-rewindable input streams backed by an OS pipe."""
    opened: List[BinaryIO] = []

    def _make(text: str) -> BinaryIO:
        read_fd, write_fd = os.pipe()
        with os.fdopen(write_fd, "wb") as writer:
            writer.write(text.encode("utf-8"))
        reader = os.fdopen(read_fd, "rb")
        opened.append(reader)
        return reader

    yield _make

    for reader in opened:
        reader.close()
