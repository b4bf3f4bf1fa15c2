"""Checksums for verifying section bodies.

CRC-16 is CRC-16/CCITT-FALSE (polynomial 0x1021, initial value 0xFFFF) and
CRC-32 is the IEEE 802.3 checksum used by zlib. Byte forms are big-endian.
"""

from __future__ import annotations

import binascii
import zlib
from typing import Callable


def crc16(data: bytes | bytearray | memoryview, init: int = 0xFFFF) -> int:
    """Calculate the CRC-16/CCITT-FALSE checksum of ``data``.

    Example:
        >>> hex(crc16(b"123456789"))
        '0x29b1'
    """
    return binascii.crc_hqx(data, init)


def crc32(data: bytes | bytearray | memoryview) -> int:
    """Calculate the CRC-32 checksum of ``data``.

    Example:
        >>> hex(crc32(b"123456789"))
        '0xcbf43926'
    """
    return zlib.crc32(data) & 0xFFFFFFFF


def crc16_bytes(data: bytes | bytearray | memoryview) -> bytes:
    return crc16(data).to_bytes(2, "big")


def crc32_bytes(data: bytes | bytearray | memoryview) -> bytes:
    return crc32(data).to_bytes(4, "big")


def _expected_value(expected: int | bytes, width: int) -> int:
    if isinstance(expected, (bytes, bytearray)):
        if len(expected) != width:
            raise ValueError(f"CRC-{width * 8} must be {width} bytes, got {len(expected)}")
        return int.from_bytes(expected, "big")
    return expected


def verify_crc16(data: bytes | bytearray | memoryview, expected: int | bytes) -> bool:
    """Return True if ``data`` has the CRC-16 ``expected`` (int or 2 bytes)."""
    return crc16(data) == _expected_value(expected, 2)


def verify_crc32(data: bytes | bytearray | memoryview, expected: int | bytes) -> bool:
    """Return True if ``data`` has the CRC-32 ``expected`` (int or 4 bytes)."""
    return crc32(data) == _expected_value(expected, 4)


# Checksum name -> (width in bytes, function).
CHECKSUMS: dict[str, tuple[int, Callable[[bytes], int]]] = {
    "crc16": (2, crc16),
    "crc32": (4, crc32),
}
