"""Length-prefixed framing built on sections.

This module provides one-call helpers for the most common framing: a length
prefix, optionally followed by a checksum, in front of each payload.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Literal, Optional, TypeVar

from ..byte_order import ByteOrder
from ..codec.decoder import Decoder
from ..codec.encoder import Encoder
from ..codec.types import FixedWidthInteger, UInt32
from ..exceptions import DataCorruptedError, InsufficientDataError, NoMoreDataError
from .headers import (
    checksummed_prefix,
    length_prefix,
    read_checksummed_prefix,
    read_length_prefix,
    verified,
)

R = TypeVar("R")

ChecksumType = Literal["crc16", "crc32"]


def write_framed(
    encoder: Encoder,
    body: Callable[[Encoder], R],
    kind: FixedWidthInteger = UInt32,
) -> R:
    """Write ``body``'s output preceded by its length as ``kind``."""
    return encoder.section(length_prefix(kind), body)


def read_framed(
    decoder: Decoder,
    body: Callable[[Decoder], R],
    kind: FixedWidthInteger = UInt32,
    *,
    ignore_leftover: bool = False,
) -> Optional[R]:
    """Read a section written by write_framed() with the same ``kind``."""
    return decoder.section(read_length_prefix(kind), body, ignore_leftover=ignore_leftover)


def iter_framed(decoder: Decoder, kind: FixedWidthInteger = UInt32) -> Iterator[bytes]:
    """Yield the payloads of consecutive length-prefixed sections.

    Iteration stops cleanly when the stream (or the decoder's budget) ends
    exactly on a section boundary. A stream ending inside a header or payload
    raises InsufficientDataError.

    Example:
        >>> with open("frames.bin", "rb") as source:
        ...     for payload in iter_framed(Decoder(source)):
        ...         handle(payload)
    """
    while decoder.remaining != 0:
        try:
            length = decoder.pop_value(kind)
        except NoMoreDataError:
            return
        try:
            payload = decoder.with_sub_decoder(length, lambda sub: sub.pop_bytes(length))
        except NoMoreDataError as err:
            raise InsufficientDataError(
                f"Stream ended after header of {length}-byte section"
            ) from err
        yield payload


def frame_payload(
    payload: bytes,
    *,
    length_kind: FixedWidthInteger = UInt32,
    checksum: Optional[ChecksumType] = None,
    byte_order: ByteOrder = ByteOrder.BIG,
) -> bytes:
    """Frame a payload with a length prefix and optional checksum.

    The frame structure is:
    - [Length] [Checksum (2 or 4 bytes, optional)] [Payload]

    Args:
        payload: Bytes to frame
        length_kind: Width of the length field (default 4 bytes)
        checksum: 'crc16', 'crc32', or None for no checksum
        byte_order: Byte order of the header fields

    Returns:
        Framed bytes

    Example:
        >>> frame_payload(b"Hello", length_kind=UInt16)
        b'\\x00\\x05Hello'
    """
    header = (
        length_prefix(length_kind)
        if checksum is None
        else checksummed_prefix(checksum, length_kind)
    )
    return Encoder.to_bytes(
        lambda encoder: encoder.section(header, lambda child: child.push_raw(payload)),
        byte_order=byte_order,
    )


def unframe_payload(
    framed: bytes,
    *,
    length_kind: FixedWidthInteger = UInt32,
    checksum: Optional[ChecksumType] = None,
    byte_order: ByteOrder = ByteOrder.BIG,
) -> bytes:
    """Unframe bytes produced by frame_payload() with the same options.

    Raises:
        InsufficientDataError: If the frame is truncated
        DataCorruptedError: If the checksum fails or bytes follow the payload
    """
    decoder = Decoder.from_bytes(framed, byte_order=byte_order, max_length=len(framed))

    def read_all(sub: Decoder) -> bytes:
        return sub.pop_bytes(sub.remaining or 0)

    payload: Any
    if checksum is None:
        payload = decoder.section(read_length_prefix(length_kind), read_all)
    else:
        payload = decoder.contextual_section(
            read_checksummed_prefix(checksum, length_kind), verified(read_all, checksum)
        )

    if decoder.remaining:
        raise DataCorruptedError(
            f"Length mismatch: {decoder.remaining} bytes follow the framed payload"
        )
    return payload
