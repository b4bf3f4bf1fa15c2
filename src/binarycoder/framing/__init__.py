"""Section framing utilities for binarycoder.

This module provides ready-made section headers (length, tag and checksum
prefixes) and one-call helpers for length-prefixed payloads.
"""

from __future__ import annotations

from .basic import (
    frame_payload,
    iter_framed,
    read_framed,
    unframe_payload,
    write_framed,
)
from .headers import (
    checksummed_prefix,
    length_prefix,
    read_checksummed_prefix,
    read_length_prefix,
    read_tagged_prefix,
    tagged_prefix,
    verified,
)

__all__ = [
    # Headers
    "length_prefix",
    "read_length_prefix",
    "tagged_prefix",
    "read_tagged_prefix",
    "checksummed_prefix",
    "read_checksummed_prefix",
    "verified",
    # Payload framing
    "write_framed",
    "read_framed",
    "iter_framed",
    "frame_payload",
    "unframe_payload",
]
