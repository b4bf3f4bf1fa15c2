"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from typing import Any, Iterable, Optional

import pytest


class RecordingSink:
    """Sink that records every write and can be scripted to misbehave.

    Each scripted result is consumed by one write: an int is returned as-is
    (without storing the data), an exception is raised. Once the script runs
    out, writes succeed and are stored in ``data``.
    """

    def __init__(self, results: Optional[Iterable[Any]] = None) -> None:
        self.calls: list[bytes] = []
        self.data = bytearray()
        self._results = list(results or [])

    def write(self, data: Any) -> Any:
        self.calls.append(bytes(data))
        if self._results:
            result = self._results.pop(0)
            if isinstance(result, BaseException):
                raise result
            return result
        self.data.extend(data)
        return len(data)


class ScriptedSource:
    """Source over in-memory bytes that records every read request.

    Scripted results work like RecordingSink's; once they run out, reads are
    served from ``data``.
    """

    def __init__(self, data: bytes = b"", results: Optional[Iterable[Any]] = None) -> None:
        self.calls: list[int] = []
        self._stream = io.BytesIO(data)
        self._results = list(results or [])

    def readinto(self, buffer: Any) -> Any:
        self.calls.append(len(buffer))
        if self._results:
            result = self._results.pop(0)
            if isinstance(result, BaseException):
                raise result
            return result
        return self._stream.readinto(buffer)

    def tell(self) -> int:
        """Number of bytes consumed from the underlying data."""
        return self._stream.tell()


@pytest.fixture
def sink() -> RecordingSink:
    """Well-behaved recording sink."""
    return RecordingSink()


@pytest.fixture
def make_sink() -> type[RecordingSink]:
    """Factory for scripted sinks."""
    return RecordingSink


@pytest.fixture
def make_source() -> type[ScriptedSource]:
    """Factory for scripted sources."""
    return ScriptedSource


@pytest.fixture
def counting_source() -> ScriptedSource:
    """Source holding bytes 0..255, so each byte equals its offset."""
    return ScriptedSource(bytes(range(256)))
