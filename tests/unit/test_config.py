"""Tests for CoderConfig."""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from binarycoder import ByteOrder, CoderConfig, Decoder, Encoder, UInt16
from binarycoder.codec.decoder import DEFAULT_DISCARD_CHUNK_SIZE


class TestCoderConfig:
    """Test configuration validation."""

    def test_defaults(self) -> None:
        """Test default settings."""
        config = CoderConfig()
        assert config.byte_order is ByteOrder.BIG
        assert config.max_length is None
        assert config.discard_chunk_size == DEFAULT_DISCARD_CHUNK_SIZE == 65536

    def test_default_matches_decoder(self) -> None:
        """Test a config-built decoder discards in the same chunks as a plain one."""
        plain = Decoder(io.BytesIO())
        configured = Decoder.from_config(io.BytesIO(), CoderConfig())
        assert configured._discard_chunk_size == plain._discard_chunk_size

    def test_raw_byte_order(self) -> None:
        """Test byte order given by its raw value."""
        assert CoderConfig(byte_order="little").byte_order is ByteOrder.LITTLE

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"byte_order": "middle"},
            {"max_length": -1},
            {"discard_chunk_size": 0},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        """Test out-of-range settings are rejected."""
        with pytest.raises(ValidationError):
            CoderConfig(**kwargs)

    def test_unknown_setting(self) -> None:
        """Test misspelled settings are rejected."""
        with pytest.raises(ValidationError):
            CoderConfig(byteorder="little")

    def test_frozen(self) -> None:
        """Test settings cannot change after construction."""
        config = CoderConfig()
        with pytest.raises(ValidationError):
            config.byte_order = ByteOrder.LITTLE


class TestFromConfig:
    """Test building coders from a config."""

    def test_encoder(self) -> None:
        """Test the encoder takes the configured byte order."""
        buffer = io.BytesIO()
        encoder = Encoder.from_config(buffer, CoderConfig(byte_order="little"))
        encoder.push_value(1, UInt16)

        assert encoder.byte_order is ByteOrder.LITTLE
        assert buffer.getvalue() == b"\x01\x00"

    def test_decoder(self) -> None:
        """Test the decoder takes the configured order and budget."""
        config = CoderConfig(byte_order="little", max_length=2)
        decoder = Decoder.from_config(io.BytesIO(b"\x01\x00\x02\x00"), config)

        assert decoder.pop_value(UInt16) == 1
        assert decoder.remaining == 0

    def test_discard_chunk_size(self) -> None:
        """Test the configured scratch size is used when skipping."""
        reads = []

        class Source(io.BytesIO):
            def readinto(self, buffer):
                reads.append(len(buffer))
                return super().readinto(buffer)

        decoder = Decoder.from_config(Source(bytes(10)), CoderConfig(discard_chunk_size=3))
        decoder.discard(10)
        assert reads == [3, 3, 3, 1]
