"""Built-in codecs for fixed-width numbers, identifiers and byte blobs.

Python numbers carry no width, so every primitive is written and read through
a descriptor naming its layout:

    >>> encoder.push_value(0x0102, UInt16)
    >>> decoder.pop_value(Float32)

Floating-point values travel as the unsigned integer of equal width holding
their IEEE 754 bit pattern; only that integer's byte order is meaningful. The
link between each float width and its bit-pattern integer is the explicit
``FLOAT_BIT_PATTERNS`` table below.

Decoded floats are Python floats, so a signaling NaN read as Float16 or
Float32 comes back quieted and re-encodes with different bits. Read
``kind.bit_pattern`` with ``pop_value`` when the exact bits must survive.
"""

from __future__ import annotations

import struct
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Union

from ..byte_order import ByteOrder
from ..exceptions import InvalidValueError

if TYPE_CHECKING:
    from .decoder import Decoder
    from .encoder import Encoder


@dataclass(frozen=True)
class FixedWidthInteger:
    """Two's complement or unsigned integer of a fixed byte width.

    Attributes:
        name: Display name (e.g. "UInt16")
        size: Width in bytes
        signed: Whether values are two's complement signed
    """

    name: str
    size: int
    signed: bool

    @property
    def bits(self) -> int:
        return self.size * 8

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def to_bytes(self, value: int, byte_order: ByteOrder) -> bytes:
        """Lay out ``value`` in ``byte_order``.

        Raises:
            InvalidValueError: If value is not an int or is out of range
        """
        if not isinstance(value, int):
            raise InvalidValueError(f"{self.name}: expected int, got {type(value).__name__}")
        try:
            return value.to_bytes(self.size, byte_order.value, signed=self.signed)
        except OverflowError as err:
            raise InvalidValueError(
                f"{self.name}: value {value} out of bounds [{self.min_value}, {self.max_value}]"
            ) from err

    def from_bytes(self, data: bytes | bytearray, byte_order: ByteOrder) -> int:
        return int.from_bytes(data, byte_order.value, signed=self.signed)

    def encode(self, encoder: Encoder, value: int) -> None:
        encoder.push_value(value, self)

    def decode(self, decoder: Decoder) -> int:
        return decoder.pop_value(self)

    def __repr__(self) -> str:
        return self.name


UInt8 = FixedWidthInteger("UInt8", 1, signed=False)
UInt16 = FixedWidthInteger("UInt16", 2, signed=False)
UInt32 = FixedWidthInteger("UInt32", 4, signed=False)
UInt64 = FixedWidthInteger("UInt64", 8, signed=False)
UInt128 = FixedWidthInteger("UInt128", 16, signed=False)

Int8 = FixedWidthInteger("Int8", 1, signed=True)
Int16 = FixedWidthInteger("Int16", 2, signed=True)
Int32 = FixedWidthInteger("Int32", 4, signed=True)
Int64 = FixedWidthInteger("Int64", 8, signed=True)
Int128 = FixedWidthInteger("Int128", 16, signed=True)

INTEGER_TYPES: tuple[FixedWidthInteger, ...] = (
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UInt128,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
)


# Float width in bytes -> (bit-pattern integer, struct format character).
# Extended-precision formats are not supported.
FLOAT_BIT_PATTERNS: dict[int, tuple[FixedWidthInteger, str]] = {
    2: (UInt16, "e"),
    4: (UInt32, "f"),
    8: (UInt64, "d"),
}


@dataclass(frozen=True)
class FixedWidthFloat:
    """IEEE 754 binary floating-point number of a fixed byte width.

    Attributes:
        name: Display name (e.g. "Float32")
        size: Width in bytes; must be a key of FLOAT_BIT_PATTERNS
    """

    name: str
    size: int

    def __post_init__(self) -> None:
        if self.size not in FLOAT_BIT_PATTERNS:
            raise ValueError(f"No bit-pattern mapping for {self.size}-byte floats")

    @property
    def bit_pattern(self) -> FixedWidthInteger:
        """Unsigned integer of equal width carrying this float's bits."""
        return FLOAT_BIT_PATTERNS[self.size][0]

    @property
    def _format(self) -> str:
        # Packed little-endian here; stream order is applied to bit_pattern.
        return "<" + FLOAT_BIT_PATTERNS[self.size][1]

    def to_bits(self, value: float) -> int:
        """Return the unsigned bit pattern of ``value`` at this width.

        Raises:
            InvalidValueError: If value is not a real number or overflows this width
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidValueError(f"{self.name}: expected float, got {type(value).__name__}")
        try:
            packed = struct.pack(self._format, value)
        except (OverflowError, struct.error) as err:
            raise InvalidValueError(f"{self.name}: cannot represent {value}: {err}") from err
        return int.from_bytes(packed, "little")

    def from_bits(self, bits: int) -> float:
        """Rebuild a float from its bit pattern; NaN payloads may be quieted."""
        return struct.unpack(self._format, bits.to_bytes(self.size, "little"))[0]

    def encode(self, encoder: Encoder, value: float) -> None:
        encoder.push_value(value, self)

    def decode(self, decoder: Decoder) -> float:
        return decoder.pop_value(self)

    def __repr__(self) -> str:
        return self.name


Float16 = FixedWidthFloat("Float16", 2)
Float32 = FixedWidthFloat("Float32", 4)
Float64 = FixedWidthFloat("Float64", 8)

FLOAT_TYPES: tuple[FixedWidthFloat, ...] = (Float16, Float32, Float64)

FixedWidthType = Union[FixedWidthInteger, FixedWidthFloat]


class UuidCodec:
    """128-bit identifier written as its 16 raw bytes.

    The identifier's layout is canonical (RFC 4122 network order) and is never
    reordered by the stream's byte order.
    """

    size = 16

    def encode(self, encoder: Encoder, value: uuid.UUID) -> None:
        if not isinstance(value, uuid.UUID):
            raise InvalidValueError(f"Uuid: expected uuid.UUID, got {type(value).__name__}")
        encoder.push_raw(value.bytes)

    def decode(self, decoder: Decoder) -> uuid.UUID:
        return uuid.UUID(bytes=decoder.pop_bytes(self.size))

    def __repr__(self) -> str:
        return "Uuid"


class BlobCodec:
    """Opaque bytes written verbatim.

    Encode-only: the blob carries no length, so the reader must learn it from
    context (typically a section header) and use ``Decoder.pop_bytes``.
    """

    def encode(self, encoder: Encoder, value: bytes | bytearray | memoryview) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InvalidValueError(f"Blob: expected bytes, got {type(value).__name__}")
        encoder.push_raw(value)

    def __repr__(self) -> str:
        return "Blob"


class SequenceOf:
    """Homogeneous sequence written element by element with no count prefix.

    Encode-only for the same reason as Blob; read sequences back with
    ``Decoder.pop_sequence(count, element)``.

    Args:
        element: Codec for each element, or None for self-encoding elements
    """

    def __init__(self, element: Any = None) -> None:
        self.element = element

    def encode(self, encoder: Encoder, values: Iterable[Any]) -> None:
        encoder.push_sequence(values, self.element)

    def __repr__(self) -> str:
        return f"SequenceOf({self.element!r})"


Uuid = UuidCodec()
Blob = BlobCodec()
