"""Byte-order-aware binary encoder.

This module provides the Encoder class, which writes typed values to a borrowed
byte sink, and the encode() convenience function for one-off values.
"""

from __future__ import annotations

import io
import logging
import uuid
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Optional, TypeVar

from ..byte_order import ByteOrder
from ..exceptions import (
    EncodeStreamError,
    InsufficientSpaceError,
    UnexpectedSinkBehaviorError,
)
from ..streams import FAILURE, ByteSink
from .protocol import BinaryEncodable, EncodeCodec
from .types import FixedWidthFloat, FixedWidthType

if TYPE_CHECKING:
    from ..config import CoderConfig

_logger = logging.getLogger(__name__)

R = TypeVar("R")

SectionHeader = Callable[["Encoder", bytes], None]


class Encoder:
    """Writes typed values to a byte sink in a configurable byte order.

    The sink is borrowed: it must be ready before the first push and is left
    open afterwards. The encoder itself holds no buffer; every push reaches the
    sink immediately, except inside section() bodies.

    Attributes:
        byte_order: Byte order applied to multi-byte values (read-only)
        sink: The borrowed sink

    Example:
        >>> buffer = io.BytesIO()
        >>> encoder = Encoder(buffer, ByteOrder.LITTLE)
        >>> encoder.push_value(0x0102, UInt16)
        >>> buffer.getvalue()
        b'\\x02\\x01'
    """

    def __init__(self, sink: ByteSink, byte_order: ByteOrder = ByteOrder.BIG) -> None:
        self._sink = sink
        self._byte_order = byte_order

    @classmethod
    def from_config(cls, sink: ByteSink, config: CoderConfig) -> Encoder:
        return cls(sink, config.byte_order)

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    @property
    def sink(self) -> ByteSink:
        return self._sink

    @contextmanager
    def temporary_byte_order(self, byte_order: ByteOrder) -> Iterator[Encoder]:
        """Apply ``byte_order`` for the duration of a ``with`` block.

        The previous order is restored however the block exits. Bytes already
        written are unaffected.

        Example:
            >>> with encoder.temporary_byte_order(ByteOrder.BIG):
            ...     encoder.push_value(1, UInt32)
        """
        previous = self._byte_order
        self._byte_order = byte_order
        try:
            yield self
        finally:
            self._byte_order = previous

    def push_raw(self, data: bytes | bytearray | memoryview) -> None:
        """Write ``data`` to the sink exactly as given.

        Args:
            data: Bytes-like buffer; an empty buffer is a no-op

        Raises:
            InsufficientSpaceError: If the sink wrote only part of the buffer
            EncodeStreamError: If the sink failed
            UnexpectedSinkBehaviorError: If the sink's result breaks its contract
        """
        view = memoryview(data).cast("B")
        expected = view.nbytes
        if expected == 0:
            return

        try:
            actual = self._sink.write(view)
        except OSError as err:
            raise EncodeStreamError(f"Sink failed writing {expected} bytes: {err}", err) from err

        if not isinstance(actual, int) or isinstance(actual, bool):
            raise UnexpectedSinkBehaviorError(
                f"Sink returned {actual!r} instead of a byte count"
            )
        if actual == expected:
            return
        if actual == FAILURE:
            raise EncodeStreamError(f"Sink failed writing {expected} bytes")
        if 0 <= actual < expected:
            raise InsufficientSpaceError(f"Sink accepted {actual} of {expected} bytes")
        raise UnexpectedSinkBehaviorError(
            f"Sink reported {actual} bytes written for a {expected}-byte buffer"
        )

    def push_value(self, value: int | float, kind: FixedWidthType) -> None:
        """Write a fixed-width number in the current byte order.

        Floats are written as the unsigned integer holding their bit pattern.

        Args:
            value: Number to write
            kind: Layout descriptor such as UInt16, Int64 or Float32

        Raises:
            InvalidValueError: If value does not fit ``kind``
        """
        if isinstance(kind, FixedWidthFloat):
            self.push_value(kind.to_bits(value), kind.bit_pattern)
            return
        self.push_raw(kind.to_bytes(value, self._byte_order))

    def push(self, value: Any, kind: Optional[EncodeCodec[Any]] = None) -> None:
        """Write one typed value.

        Args:
            value: Value to write
            kind: Codec to write it with. If None, the value must be bytes-like,
                a uuid.UUID, a BinaryEncodable, or a list/tuple of those.

        Raises:
            TypeError: If no layout is known for the value
        """
        if kind is not None:
            kind.encode(self, value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self.push_raw(value)
        elif isinstance(value, uuid.UUID):
            self.push_raw(value.bytes)
        elif isinstance(value, str):
            raise TypeError("str has no binary layout; encode it to bytes first")
        elif isinstance(value, BinaryEncodable):
            value.encode(self)
        elif isinstance(value, (list, tuple)):
            self.push_sequence(value)
        else:
            raise TypeError(
                f"No binary layout for {type(value).__name__}; pass a codec such as UInt32"
            )

    def push_sequence(
        self, values: Iterable[Any], kind: Optional[EncodeCodec[Any]] = None
    ) -> None:
        """Write each element of ``values`` in order, without a count prefix."""
        for value in values:
            self.push(value, kind)

    def section(
        self,
        header: SectionHeader,
        body: Callable[[Encoder], R],
    ) -> R:
        """Write a nested region whose header depends on its encoded body.

        ``body`` runs first against an in-memory child encoder sharing the
        current byte order. ``header(self, data)`` then runs with the child's
        complete output, typically writing its length, and finally ``data`` is
        appended to this encoder's sink.

        The whole body is held in memory, so this is unsuitable for very large
        regions; see utils.sizing.encoded_size for a non-buffering pre-pass.

        Example:
            >>> encoder.section(
            ...     header=lambda parent, data: parent.push_value(len(data), UInt32),
            ...     body=lambda child: child.push_raw(b"payload"),
            ... )

        Returns:
            Whatever ``body`` returns
        """
        buffer = io.BytesIO()
        child = Encoder(buffer, self._byte_order)
        result = body(child)
        data = buffer.getvalue()

        header(self, data)
        self.push_raw(data)
        _logger.debug("Spliced %d-byte section", len(data))
        return result

    @classmethod
    def to_bytes(
        cls,
        body: Callable[[Encoder], Any],
        *,
        byte_order: ByteOrder = ByteOrder.BIG,
    ) -> bytes:
        """Run ``body`` against a memory-backed encoder and return its output."""
        buffer = io.BytesIO()
        body(cls(buffer, byte_order))
        return buffer.getvalue()


def encode(
    value: Any,
    kind: Optional[EncodeCodec[Any]] = None,
    *,
    byte_order: ByteOrder = ByteOrder.BIG,
) -> bytes:
    """Encode a single value to bytes.

    Args:
        value: Value to encode
        kind: Codec for the value (see Encoder.push)
        byte_order: Byte order for multi-byte values, big-endian by default

    Returns:
        Encoded bytes

    Example:
        >>> encode(0x0102, UInt16, byte_order=ByteOrder.LITTLE)
        b'\\x02\\x01'
    """
    return Encoder.to_bytes(lambda encoder: encoder.push(value, kind), byte_order=byte_order)
