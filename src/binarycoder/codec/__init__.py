"""Byte-order-aware binary codec for binarycoder.

This module provides the Encoder and Decoder primitives, the built-in
fixed-width codecs and the typed value protocol.
"""

from __future__ import annotations

from .decoder import Decoder, decode
from .encoder import Encoder, encode
from .protocol import BinaryDecodable, BinaryEncodable, Codec, DecodeCodec, EncodeCodec
from .types import (
    FLOAT_BIT_PATTERNS,
    FLOAT_TYPES,
    INTEGER_TYPES,
    Blob,
    FixedWidthFloat,
    FixedWidthInteger,
    FixedWidthType,
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
)

__all__ = [
    "Encoder",
    "Decoder",
    "encode",
    "decode",
    # Protocols
    "BinaryEncodable",
    "BinaryDecodable",
    "Codec",
    "EncodeCodec",
    "DecodeCodec",
    # Codecs
    "FixedWidthInteger",
    "FixedWidthFloat",
    "FixedWidthType",
    "FLOAT_BIT_PATTERNS",
    "INTEGER_TYPES",
    "FLOAT_TYPES",
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
]
