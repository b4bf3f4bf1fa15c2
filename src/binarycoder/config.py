"""Coder configuration.

This module provides CoderConfig, a validated bundle of the settings shared by
encoders and decoders, so that both sides of a stream can be built from one
object.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

from .byte_order import ByteOrder
from .codec.decoder import DEFAULT_DISCARD_CHUNK_SIZE


class CoderConfig(BaseModel):
    """Settings for Encoder.from_config() and Decoder.from_config().

    Attributes:
        byte_order: Byte order for multi-byte values (default big-endian).
            Accepts a ByteOrder or its raw value ("little" / "big").
        max_length: Initial decoder budget in bytes, or None for unbounded.
            Ignored by encoders.
        discard_chunk_size: Size of the scratch buffer used when skipping
            bytes (default 64 KiB). Ignored by encoders.

    Examples:
        ```python
        from binarycoder import CoderConfig, Decoder, Encoder

        config = CoderConfig(byte_order="little", max_length=1024)

        with open("frames.bin", "rb") as source:
            decoder = Decoder.from_config(source, config)
        ```
    """

    model_config = ConfigDict(
        # Immutable once built
        frozen=True,
        # Forbid settings not defined here
        extra="forbid",
    )

    byte_order: ByteOrder = ByteOrder.BIG
    max_length: Optional[NonNegativeInt] = None
    discard_chunk_size: PositiveInt = Field(default=DEFAULT_DISCARD_CHUNK_SIZE)
