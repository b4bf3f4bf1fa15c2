"""binarycoder: Byte-Order-Aware Binary Coder

A Python library for writing and reading fixed-layout binary streams. An
Encoder writes typed values to any byte sink and a Decoder reads them back from
any byte source, with bounded reads and nested, size-prefixed sections.

Key Features:
- Explicit byte order per stream, with scoped overrides
- Fixed-width integers (8 to 128 bits), IEEE 754 floats and UUIDs
- Byte budgets that stop a decoder from reading past its region
- Size-prefixed sections without a length pre-pass
- Works with files, io.BytesIO and socket streams

Quick Start:
    >>> import io
    >>> from binarycoder import ByteOrder, Decoder, Encoder, UInt16, UInt32
    >>>
    >>> buffer = io.BytesIO()
    >>> encoder = Encoder(buffer, ByteOrder.LITTLE)
    >>> encoder.section(
    ...     header=lambda parent, data: parent.push_value(len(data), UInt32),
    ...     body=lambda child: child.push_value(0x0102, UInt16),
    ... )
    >>> buffer.getvalue()
    b'\\x02\\x00\\x00\\x00\\x02\\x01'
    >>>
    >>> _ = buffer.seek(0)
    >>> decoder = Decoder(buffer, ByteOrder.LITTLE)
    >>> decoder.section(
    ...     header=lambda d: d.pop_value(UInt32),
    ...     body=lambda sub: sub.pop_value(UInt16),
    ... )
    258
"""

from __future__ import annotations

from .byte_order import ByteOrder
from .codec import (
    BinaryDecodable,
    BinaryEncodable,
    Blob,
    Codec,
    Decoder,
    Encoder,
    FixedWidthFloat,
    FixedWidthInteger,
    Float16,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Int128,
    SequenceOf,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UInt128,
    Uuid,
    decode,
    encode,
)
from .config import CoderConfig
from .exceptions import (
    BinaryCoderError,
    DataCorruptedError,
    DecodeError,
    DecodeStreamError,
    EncodeError,
    EncodeStreamError,
    InsufficientDataError,
    InsufficientSpaceError,
    InvalidValueError,
    NoMoreDataError,
    UnexpectedSinkBehaviorError,
    UnexpectedSourceBehaviorError,
)
from .framing import (
    checksummed_prefix,
    frame_payload,
    iter_framed,
    length_prefix,
    read_checksummed_prefix,
    read_framed,
    read_length_prefix,
    read_tagged_prefix,
    tagged_prefix,
    unframe_payload,
    verified,
    write_framed,
)
from .streams import ByteSink, ByteSource, CountingSink
from .utils import (
    crc16,
    crc16_bytes,
    crc32,
    crc32_bytes,
    encoded_size,
    verify_crc16,
    verify_crc32,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "ByteOrder",
    "Encoder",
    "Decoder",
    "encode",
    "decode",
    "CoderConfig",
    # Streams
    "ByteSink",
    "ByteSource",
    "CountingSink",
    # Typed values
    "BinaryEncodable",
    "BinaryDecodable",
    "Codec",
    "FixedWidthInteger",
    "FixedWidthFloat",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt128",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Int128",
    "Float16",
    "Float32",
    "Float64",
    "Uuid",
    "Blob",
    "SequenceOf",
    # Exceptions
    "BinaryCoderError",
    "EncodeError",
    "InvalidValueError",
    "InsufficientSpaceError",
    "EncodeStreamError",
    "UnexpectedSinkBehaviorError",
    "DecodeError",
    "NoMoreDataError",
    "InsufficientDataError",
    "DataCorruptedError",
    "DecodeStreamError",
    "UnexpectedSourceBehaviorError",
    # Framing
    "length_prefix",
    "read_length_prefix",
    "tagged_prefix",
    "read_tagged_prefix",
    "checksummed_prefix",
    "read_checksummed_prefix",
    "verified",
    "write_framed",
    "read_framed",
    "iter_framed",
    "frame_payload",
    "unframe_payload",
    # CRC
    "crc16",
    "crc16_bytes",
    "crc32",
    "crc32_bytes",
    "verify_crc16",
    "verify_crc32",
    # Sizing
    "encoded_size",
    # Version
    "__version__",
]
