"""Tests for encoded size calculation."""

from __future__ import annotations

import io
import uuid

from binarycoder import (
    CountingSink,
    Encoder,
    Float16,
    UInt8,
    UInt64,
    Uuid,
    encoded_size,
    length_prefix,
)


def test_counting_sink() -> None:
    """Test the counting sink accepts and counts every write."""
    sink = CountingSink()
    assert sink.write(b"abc") == 3
    assert sink.write(memoryview(bytearray(5))) == 5
    assert sink.count == 8


def test_value_sizes() -> None:
    """Test sizes of single values."""
    assert encoded_size(lambda e: e.push_value(1, UInt8)) == 1
    assert encoded_size(lambda e: e.push_value(1.5, Float16)) == 2
    assert encoded_size(lambda e: e.push(uuid.uuid4(), Uuid)) == 16


def test_matches_real_encoding() -> None:
    """Test the measured size equals the bytes actually written."""

    def body(encoder: Encoder) -> None:
        encoder.push_sequence(range(10), UInt64)
        encoder.section(length_prefix(UInt8), lambda c: c.push_raw(b"abc"))

    buffer = io.BytesIO()
    body(Encoder(buffer))

    assert encoded_size(body) == len(buffer.getvalue()) == 84


def test_size_prefix_without_buffering() -> None:
    """Test writing a size prefix ahead of an unbuffered body."""

    def body(encoder: Encoder) -> None:
        encoder.push_sequence([1, 2, 3], UInt64)

    buffer = io.BytesIO()
    encoder = Encoder(buffer)
    encoder.push_value(encoded_size(body), UInt64)
    body(encoder)

    assert buffer.getvalue()[:8] == (24).to_bytes(8, "big")
    assert len(buffer.getvalue()) == 32
