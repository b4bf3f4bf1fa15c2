"""Byte sink and byte source contracts.

Encoders write to a ByteSink and decoders read from a ByteSource. Both are
borrowed: binarycoder never opens or closes them. Binary file objects,
``io.BytesIO`` and ``socket.makefile("rb"/"wb")`` conform out of the box.

Sink contract:
    ``write(data)`` returns the number of bytes written. A result of -1 means
    "failed, no further information"; raising OSError means "failed" with the
    exception as detail.

Source contract:
    ``readinto(buffer)`` fills at most ``len(buffer)`` bytes and returns the
    count, 0 meaning end of data. -1 and OSError signal failure as above.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Sentinel returned by sinks/sources that fail without raising.
FAILURE = -1


@runtime_checkable
class ByteSink(Protocol):
    """Destination of encoded bytes."""

    def write(self, data: bytes | bytearray | memoryview, /) -> int | None:
        ...


@runtime_checkable
class ByteSource(Protocol):
    """Origin of bytes to decode."""

    def readinto(self, buffer: bytearray | memoryview, /) -> int | None:
        ...


class CountingSink:
    """Sink that accepts every write and only counts the bytes.

    Example:
        >>> sink = CountingSink()
        >>> sink.write(b"abc")
        3
        >>> sink.count
        3
    """

    def __init__(self) -> None:
        self.count = 0

    def write(self, data: bytes | bytearray | memoryview, /) -> int:
        size = len(data)
        self.count += size
        return size
