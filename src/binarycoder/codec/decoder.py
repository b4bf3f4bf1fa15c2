"""Byte-order-aware binary decoder with bounded reads.

This module provides the Decoder class, which reads typed values from a
borrowed byte source, optionally within a byte budget, and the decode()
convenience function for one-off values.
"""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
)

from ..byte_order import ByteOrder
from ..exceptions import (
    DataCorruptedError,
    DecodeStreamError,
    InsufficientDataError,
    NoMoreDataError,
    UnexpectedSourceBehaviorError,
)
from ..streams import FAILURE, ByteSource
from .protocol import DecodeCodec
from .types import FixedWidthFloat, FixedWidthType

if TYPE_CHECKING:
    from ..config import CoderConfig

_logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
C = TypeVar("C")

DEFAULT_DISCARD_CHUNK_SIZE = 65536


class Decoder:
    """Reads typed values from a byte source in a configurable byte order.

    A decoder may hold a budget (``remaining``): the number of bytes it is
    still entitled to read. Every successful read lowers it and any request
    larger than it fails before the source is touched. Without a budget the
    decoder relies on the source to signal the end of data.

    The source is borrowed: it must be ready before the first read and is
    left open afterwards.

    Attributes:
        byte_order: Byte order applied to multi-byte values (read-only)
        source: The borrowed source
        remaining: Bytes left in the budget, or None when unbounded

    Example:
        >>> decoder = Decoder(io.BytesIO(b"\\x01\\x02"), ByteOrder.BIG, max_length=2)
        >>> decoder.pop_value(UInt16)
        258
        >>> decoder.remaining
        0
    """

    def __init__(
        self,
        source: ByteSource,
        byte_order: ByteOrder = ByteOrder.BIG,
        max_length: Optional[int] = None,
        *,
        discard_chunk_size: int = DEFAULT_DISCARD_CHUNK_SIZE,
    ) -> None:
        if max_length is not None and max_length < 0:
            raise ValueError(f"max_length must be >= 0, got {max_length}")
        if discard_chunk_size <= 0:
            raise ValueError(f"discard_chunk_size must be > 0, got {discard_chunk_size}")
        self._source = source
        self._byte_order = byte_order
        self._remaining = max_length
        self._discard_chunk_size = discard_chunk_size

    @classmethod
    def from_config(cls, source: ByteSource, config: CoderConfig) -> Decoder:
        return cls(
            source,
            config.byte_order,
            config.max_length,
            discard_chunk_size=config.discard_chunk_size,
        )

    @classmethod
    def from_bytes(
        cls,
        data: bytes | bytearray | memoryview,
        *,
        byte_order: ByteOrder = ByteOrder.BIG,
        max_length: Optional[int] = None,
    ) -> Decoder:
        """Create a decoder over an in-memory copy of ``data``."""
        return cls(io.BytesIO(bytes(data)), byte_order, max_length)

    @property
    def byte_order(self) -> ByteOrder:
        return self._byte_order

    @property
    def source(self) -> ByteSource:
        return self._source

    @property
    def remaining(self) -> Optional[int]:
        return self._remaining

    @contextmanager
    def temporary_byte_order(self, byte_order: ByteOrder) -> Iterator[Decoder]:
        """Apply ``byte_order`` for the duration of a ``with`` block."""
        previous = self._byte_order
        self._byte_order = byte_order
        try:
            yield self
        finally:
            self._byte_order = previous

    def pop_into(self, buffer: bytearray | memoryview) -> None:
        """Fill ``buffer`` completely from the source.

        Args:
            buffer: Writable buffer; an empty buffer is a no-op

        Raises:
            InsufficientDataError: If the budget is smaller than the buffer, or
                the source returned fewer bytes than requested
            NoMoreDataError: If the source had no data left at all
            DecodeStreamError: If the source failed
            UnexpectedSourceBehaviorError: If the source's result breaks its contract
        """
        view = memoryview(buffer).cast("B")
        requested = view.nbytes
        if requested == 0:
            return

        if self._remaining is not None and requested > self._remaining:
            raise InsufficientDataError(
                f"Read of {requested} bytes exceeds remaining budget of {self._remaining}"
            )

        try:
            actual = self._source.readinto(view)
        except OSError as err:
            raise DecodeStreamError(f"Source failed reading {requested} bytes: {err}", err) from err

        if not isinstance(actual, int) or isinstance(actual, bool):
            raise UnexpectedSourceBehaviorError(
                f"Source returned {actual!r} instead of a byte count"
            )
        if 0 < actual <= requested and self._remaining is not None:
            self._remaining -= actual

        if actual == requested:
            return
        if actual < FAILURE or actual > requested:
            raise UnexpectedSourceBehaviorError(
                f"Source reported {actual} bytes read for a {requested}-byte request"
            )
        if actual == FAILURE:
            raise DecodeStreamError(f"Source failed reading {requested} bytes")
        if actual == 0:
            raise NoMoreDataError(f"No more data: expected {requested} bytes")
        raise InsufficientDataError(f"Short read: got {actual} of {requested} bytes")

    def pop_bytes(self, count: int) -> bytes:
        """Read exactly ``count`` bytes."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        buffer = bytearray(count)
        self.pop_into(buffer)
        return bytes(buffer)

    def pop_value(self, kind: FixedWidthType) -> Any:
        """Read a fixed-width number laid out in the current byte order.

        Args:
            kind: Layout descriptor such as UInt16, Int64 or Float32

        Returns:
            int for integer descriptors, float for float descriptors
        """
        if isinstance(kind, FixedWidthFloat):
            return kind.from_bits(self.pop_value(kind.bit_pattern))
        return kind.from_bytes(self.pop_bytes(kind.size), self._byte_order)

    def pop(self, kind: DecodeCodec[T]) -> T:
        """Read one typed value with a codec or a BinaryDecodable class."""
        return kind.decode(self)

    def pop_sequence(self, count: int, kind: DecodeCodec[T]) -> list[T]:
        """Read ``count`` consecutive values of ``kind``.

        The list is returned only if every element decodes; a failure on any
        element propagates and no partial result is produced.
        """
        return list(self.iter_values(count, kind))

    def iter_values(self, count: int, kind: DecodeCodec[T]) -> Iterator[T]:
        """Yield ``count`` consecutive values of ``kind`` one at a time."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        for _ in range(count):
            yield kind.decode(self)

    def discard(self, count: int) -> None:
        """Consume and drop ``count`` bytes.

        Raises:
            InsufficientDataError: If ``count`` exceeds the remaining budget
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if self._remaining is not None and count > self._remaining:
            raise InsufficientDataError(
                f"Cannot discard {count} bytes with remaining budget of {self._remaining}"
            )

        scratch = bytearray(min(count, self._discard_chunk_size))
        view = memoryview(scratch)
        while count > 0:
            chunk = min(count, len(scratch))
            self.pop_into(view[:chunk])
            count -= chunk

    def _open_sub_decoder(self, count: int) -> Decoder:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if self._remaining is not None:
            if count > self._remaining:
                raise InsufficientDataError(
                    f"Sub-region of {count} bytes exceeds remaining budget of {self._remaining}"
                )
            self._remaining -= count

        return Decoder(
            self._source,
            self._byte_order,
            count,
            discard_chunk_size=self._discard_chunk_size,
        )

    @staticmethod
    def _close_sub_decoder(sub: Decoder, ignore_leftover: bool) -> None:
        leftover = sub.remaining or 0
        if leftover == 0:
            return
        if ignore_leftover:
            _logger.debug("Abandoning %d leftover bytes of sub-region", leftover)
            return
        _logger.debug("Discarding %d leftover bytes of sub-region", leftover)
        sub.discard(leftover)

    def with_sub_decoder(
        self,
        count: int,
        body: Callable[[Decoder], R],
        *,
        ignore_leftover: bool = False,
    ) -> R:
        """Run ``body`` against a sub-decoder bounded to the next ``count`` bytes.

        The ``count`` bytes are reserved from this decoder's budget before
        ``body`` runs, however much of them ``body`` reads. Afterwards, unless
        ``ignore_leftover`` is true, bytes ``body`` left unread are drained from
        the source so the stream is positioned right after the region. With
        ``ignore_leftover`` they stay unread in the source.

        If ``body`` raises, nothing is drained and the error propagates.

        Args:
            count: Size of the sub-region in bytes
            body: Callable receiving the sub-decoder
            ignore_leftover: Skip draining unread bytes

        Returns:
            Whatever ``body`` returns

        Raises:
            InsufficientDataError: If ``count`` exceeds the remaining budget
        """
        sub = self._open_sub_decoder(count)
        result = body(sub)
        self._close_sub_decoder(sub, ignore_leftover)
        return result

    @contextmanager
    def sub_decoder(self, count: int, *, ignore_leftover: bool = False) -> Iterator[Decoder]:
        """Context-manager form of with_sub_decoder().

        Example:
            >>> with decoder.sub_decoder(10) as sub:
            ...     magic = sub.pop_value(UInt32)
        """
        sub = self._open_sub_decoder(count)
        yield sub
        self._close_sub_decoder(sub, ignore_leftover)

    def section(
        self,
        header: Callable[[Decoder], Optional[int]],
        body: Callable[[Decoder], R],
        *,
        ignore_leftover: bool = False,
    ) -> Optional[R]:
        """Read a nested region whose size is given by a header.

        ``header(self)`` reads the header directly from this decoder and
        returns the region's byte count, or None when no region is present (in
        which case nothing else happens). ``body`` then runs against a
        sub-decoder bounded to that count, as in with_sub_decoder().

        Example:
            >>> payload = decoder.section(
            ...     header=lambda d: d.pop_value(UInt32),
            ...     body=lambda sub: sub.pop_bytes(sub.remaining),
            ... )

        Returns:
            Whatever ``body`` returns, or None if the header reported no region
        """
        count = header(self)
        if count is None:
            return None
        _logger.debug("Reading %d-byte section", count)
        return self.with_sub_decoder(count, body, ignore_leftover=ignore_leftover)

    def contextual_section(
        self,
        header: Callable[[Decoder], Optional[Tuple[int, C]]],
        body: Callable[[Decoder, C], R],
        *,
        ignore_leftover: bool = False,
    ) -> Optional[R]:
        """Like section(), with a header that also extracts context for the body.

        ``header(self)`` returns None or a ``(count, context)`` pair, and
        ``body(sub, context)`` receives the context, for example a type tag read
        from the header.
        """
        parsed = header(self)
        if parsed is None:
            return None
        count, context = parsed
        _logger.debug("Reading %d-byte section with context %r", count, context)
        return self.with_sub_decoder(
            count, lambda sub: body(sub, context), ignore_leftover=ignore_leftover
        )


def decode(
    kind: DecodeCodec[T],
    data: bytes | bytearray | memoryview,
    *,
    byte_order: ByteOrder = ByteOrder.BIG,
    exact: bool = True,
) -> T:
    """Decode a single value from bytes.

    Args:
        kind: Codec or BinaryDecodable class to decode with
        data: Encoded bytes
        byte_order: Byte order for multi-byte values, big-endian by default
        exact: If True, bytes left after the value are an error

    Returns:
        Decoded value

    Raises:
        DecodeError: If data is truncated, or has trailing bytes with exact=True

    Example:
        >>> decode(UInt16, b"\\x02\\x01", byte_order=ByteOrder.LITTLE)
        258
    """
    decoder = Decoder.from_bytes(data, byte_order=byte_order, max_length=len(data))
    value = decoder.pop(kind)
    if exact and decoder.remaining:
        raise DataCorruptedError(f"{decoder.remaining} trailing bytes after decoded value")
    return value
