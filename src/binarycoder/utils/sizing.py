"""Encoded size calculation.

This module measures how many bytes an encoding produces without keeping
them, which allows a size prefix to be written before a large body without
buffering the body the way Encoder.section() does.
"""

from __future__ import annotations

from typing import Any, Callable

from ..byte_order import ByteOrder
from ..codec.encoder import Encoder
from ..streams import CountingSink


def encoded_size(body: Callable[[Encoder], Any], byte_order: ByteOrder = ByteOrder.BIG) -> int:
    """Calculate the number of bytes ``body`` writes.

    ``body`` is run against an encoder whose sink only counts bytes, so it
    must be deterministic: running it again for real has to write the same
    bytes.

    Args:
        body: Callable writing to the encoder it receives
        byte_order: Byte order to encode with

    Returns:
        Size in bytes

    Example:
        >>> encoded_size(lambda e: e.push_value(7, UInt32))
        4
        >>> records = [...]
        >>> size = encoded_size(lambda e: e.push_sequence(records))
        >>> encoder.push_value(size, UInt64)
        >>> encoder.push_sequence(records)
    """
    sink = CountingSink()
    body(Encoder(sink, byte_order))
    return sink.count
