"""Utility functions for binarycoder.

This module provides CRC checksums and size calculation.
"""

from __future__ import annotations

from .checksum import (
    CHECKSUMS,
    crc16,
    crc16_bytes,
    crc32,
    crc32_bytes,
    verify_crc16,
    verify_crc32,
)
from .sizing import encoded_size

__all__ = [
    # CRC functions
    "CHECKSUMS",
    "crc16",
    "crc16_bytes",
    "crc32",
    "crc32_bytes",
    "verify_crc16",
    "verify_crc32",
    # Sizing functions
    "encoded_size",
]
