"""Byte order (endianness) of multi-byte values in a stream."""

from __future__ import annotations

import enum
import sys
from typing import Any, Optional


class ByteOrder(enum.Enum):
    """Rule for ordering a multi-byte value's bytes in a stream.

    The raw values match the ``byteorder`` argument of ``int.to_bytes`` and
    ``sys.byteorder``, so a ByteOrder converts losslessly to and from both.

    Example:
        >>> ByteOrder.from_raw("big")
        <ByteOrder.BIG: 'big'>
        >>> ByteOrder.from_raw("middle") is None
        True
    """

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def from_raw(cls, value: Any) -> Optional[ByteOrder]:
        """Return the byte order for a raw discriminant, or None if unrecognized."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @property
    def raw_value(self) -> str:
        return self.value

    @property
    def struct_prefix(self) -> str:
        """Byte order character for ``struct`` format strings."""
        return "<" if self is ByteOrder.LITTLE else ">"

    @classmethod
    def host(cls) -> ByteOrder:
        """Native byte order of the running interpreter.

        ``sys.byteorder`` is consulted on every call; callers that need the
        value repeatedly may keep their own copy.
        """
        order = cls.from_raw(sys.byteorder)
        if order is None:
            raise RuntimeError(f"Unsupported host byte order: {sys.byteorder!r}")
        return order
