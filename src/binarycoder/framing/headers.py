"""Ready-made section headers.

Each factory returns a callback for Encoder.section() or for
Decoder.section() / Decoder.contextual_section(). Writers and readers with the
same arguments interoperate:

    >>> encoder.section(length_prefix(UInt16), lambda child: child.push_raw(b"abc"))
    >>> decoder.section(read_length_prefix(UInt16), lambda sub: sub.pop_bytes(3))
    b'abc'

Header fields use the stream's current byte order.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple

from ..codec.decoder import Decoder
from ..codec.encoder import Encoder
from ..codec.types import FixedWidthInteger, UInt16, UInt32
from ..exceptions import DataCorruptedError
from ..utils.checksum import CHECKSUMS

_CHECKSUM_KINDS = {2: UInt16, 4: UInt32}

EncoderHeader = Callable[[Encoder, bytes], None]


def _checksum(name: str) -> tuple[FixedWidthInteger, Callable[[bytes], int]]:
    try:
        width, function = CHECKSUMS[name]
    except KeyError:
        raise ValueError(
            f"Invalid checksum type: {name}. Must be one of {sorted(CHECKSUMS)}"
        ) from None
    return _CHECKSUM_KINDS[width], function


def length_prefix(kind: FixedWidthInteger = UInt32) -> EncoderHeader:
    """Header writing the body length as ``kind``.

    Raises (when called):
        InvalidValueError: If the body is too long for ``kind``
    """

    def header(encoder: Encoder, data: bytes) -> None:
        encoder.push_value(len(data), kind)

    return header


def read_length_prefix(kind: FixedWidthInteger = UInt32) -> Callable[[Decoder], int]:
    """Header reading a body length written by length_prefix(kind)."""

    def header(decoder: Decoder) -> int:
        return decoder.pop_value(kind)

    return header


def tagged_prefix(
    tag: int,
    tag_kind: FixedWidthInteger = UInt16,
    length_kind: FixedWidthInteger = UInt32,
) -> EncoderHeader:
    """Header writing a type tag followed by the body length.

    This is useful for multiplexing several kinds of section over one stream;
    the reader receives the tag as context.

    Args:
        tag: Caller-defined section type
        tag_kind: Width of the tag field
        length_kind: Width of the length field
    """
    if not tag_kind.min_value <= tag <= tag_kind.max_value:
        raise ValueError(
            f"Tag must be {tag_kind.min_value}-{tag_kind.max_value} for {tag_kind!r}, got {tag}"
        )

    def header(encoder: Encoder, data: bytes) -> None:
        encoder.push_value(tag, tag_kind)
        encoder.push_value(len(data), length_kind)

    return header


def read_tagged_prefix(
    tag_kind: FixedWidthInteger = UInt16,
    length_kind: FixedWidthInteger = UInt32,
) -> Callable[[Decoder], Tuple[int, int]]:
    """Header for contextual_section() returning ``(length, tag)``."""

    def header(decoder: Decoder) -> Tuple[int, int]:
        tag = decoder.pop_value(tag_kind)
        length = decoder.pop_value(length_kind)
        return length, tag

    return header


def checksummed_prefix(
    checksum: str = "crc32",
    length_kind: FixedWidthInteger = UInt32,
) -> EncoderHeader:
    """Header writing the body length followed by a checksum of the body.

    Args:
        checksum: "crc16" or "crc32"
        length_kind: Width of the length field
    """
    checksum_kind, function = _checksum(checksum)

    def header(encoder: Encoder, data: bytes) -> None:
        encoder.push_value(len(data), length_kind)
        encoder.push_value(function(data), checksum_kind)

    return header


def read_checksummed_prefix(
    checksum: str = "crc32",
    length_kind: FixedWidthInteger = UInt32,
) -> Callable[[Decoder], Tuple[int, int]]:
    """Header for contextual_section() returning ``(length, expected_checksum)``.

    Pair it with verified() to check the body before decoding it.
    """
    checksum_kind, _ = _checksum(checksum)

    def header(decoder: Decoder) -> Tuple[int, int]:
        length = decoder.pop_value(length_kind)
        expected = decoder.pop_value(checksum_kind)
        return length, expected

    return header


def verified(
    body: Callable[[Decoder], Any],
    checksum: str = "crc32",
) -> Callable[[Decoder, int], Any]:
    """Wrap ``body`` so the section is checksummed before it is decoded.

    The returned callable reads the whole section into memory, compares its
    checksum with the one from read_checksummed_prefix(), then runs ``body``
    against an in-memory decoder over those bytes using the same byte order.

    Raises (when called):
        DataCorruptedError: If the checksum does not match
    """
    _, function = _checksum(checksum)

    def checked(sub: Decoder, expected: int) -> Any:
        data = sub.pop_bytes(sub.remaining or 0)
        actual = function(data)
        if actual != expected:
            raise DataCorruptedError(
                f"{checksum.upper()} verification failed: "
                f"expected 0x{expected:x}, got 0x{actual:x}"
            )
        return body(Decoder.from_bytes(data, byte_order=sub.byte_order, max_length=len(data)))

    return checked
