"""End-to-end integration tests."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from pathlib import Path

import pytest

from binarycoder import (
    ByteOrder,
    DataCorruptedError,
    DecodeError,
    Decoder,
    Encoder,
    Float32,
    Float64,
    Int32,
    UInt8,
    UInt16,
    UInt32,
    Uuid,
    checksummed_prefix,
    length_prefix,
    read_checksummed_prefix,
    read_length_prefix,
    read_tagged_prefix,
    tagged_prefix,
    verified,
)


class RecordTag(enum.IntEnum):
    """Section types in the test container."""

    SAMPLE = 1
    NOTE = 2
    TELEMETRY = 3


@dataclass
class Sample:
    """Fixed-layout record."""

    sensor: uuid.UUID
    reading: float
    offset: int

    def encode(self, encoder: Encoder) -> None:
        encoder.push(self.sensor, Uuid)
        encoder.push_value(self.reading, Float64)
        encoder.push_value(self.offset, Int32)

    @classmethod
    def decode(cls, decoder: Decoder) -> Sample:
        return cls(decoder.pop(Uuid), decoder.pop_value(Float64), decoder.pop_value(Int32))


@dataclass
class Telemetry:
    """Record whose samples sit in a checksummed little-endian section."""

    channel: int
    values: list[float]

    def encode(self, encoder: Encoder) -> None:
        encoder.push_value(self.channel, UInt8)
        encoder.push_value(len(self.values), UInt16)
        with encoder.temporary_byte_order(ByteOrder.LITTLE):
            encoder.section(
                checksummed_prefix("crc16"),
                lambda child: child.push_sequence(self.values, Float32),
            )

    @classmethod
    def decode(cls, decoder: Decoder) -> Telemetry:
        channel = decoder.pop_value(UInt8)
        count = decoder.pop_value(UInt16)
        with decoder.temporary_byte_order(ByteOrder.LITTLE):
            values = decoder.contextual_section(
                read_checksummed_prefix("crc16"),
                verified(lambda sub: sub.pop_sequence(count, Float32), "crc16"),
            )
        return cls(channel, values)


MAGIC = b"BCTR"


def write_container(path: Path, records: list[tuple[RecordTag, object]]) -> None:
    with open(path, "wb") as sink:
        encoder = Encoder(sink, ByteOrder.BIG)
        encoder.push_raw(MAGIC)
        encoder.push_value(len(records), UInt32)
        for tag, record in records:
            if tag is RecordTag.NOTE:
                encoder.section(tagged_prefix(tag), lambda child, r=record: child.push_raw(r))
            else:
                encoder.section(tagged_prefix(tag), lambda child, r=record: child.push(r))


def read_container(path: Path, known=frozenset(RecordTag)) -> list[object]:
    def read_record(sub: Decoder, tag: int) -> object:
        if tag not in known:
            return None
        if tag == RecordTag.SAMPLE:
            return sub.pop(Sample)
        if tag == RecordTag.TELEMETRY:
            return sub.pop(Telemetry)
        return sub.pop_bytes(sub.remaining).decode("utf-8")

    with open(path, "rb") as source:
        size = path.stat().st_size
        decoder = Decoder(source, ByteOrder.BIG, max_length=size)
        if decoder.pop_bytes(len(MAGIC)) != MAGIC:
            raise DataCorruptedError("bad magic")
        count = decoder.pop_value(UInt32)
        records = [decoder.contextual_section(read_tagged_prefix(), read_record) for _ in range(count)]
        if decoder.remaining:
            raise DataCorruptedError("trailing bytes")
    return records


@pytest.fixture
def records() -> list[tuple[RecordTag, object]]:
    return [
        (RecordTag.SAMPLE, Sample(uuid.UUID(int=0x1234), 21.5, -3)),
        (RecordTag.NOTE, "calibrated".encode("utf-8")),
        (RecordTag.TELEMETRY, Telemetry(7, [0.5, -1.25, 3.0])),
        (RecordTag.SAMPLE, Sample(uuid.UUID(int=2**128 - 1), -0.0, 2**31 - 1)),
    ]


def test_container_round_trip(tmp_path: Path, records) -> None:
    """Test a file of mixed records written and read back."""
    path = tmp_path / "records.bin"
    write_container(path, records)

    decoded = read_container(path)
    assert decoded[0] == records[0][1]
    assert decoded[1] == "calibrated"
    assert decoded[2] == records[2][1]
    assert decoded[3] == records[3][1]


def test_unknown_sections_skipped(tmp_path: Path, records) -> None:
    """Test a reader that does not know every tag still reads the rest."""
    path = tmp_path / "records.bin"
    write_container(path, records)

    decoded = read_container(path, known=frozenset({RecordTag.SAMPLE}))
    assert decoded == [records[0][1], None, None, records[3][1]]


def test_telemetry_byte_order(tmp_path: Path) -> None:
    """Test the nested section switches to little-endian and back."""
    path = tmp_path / "records.bin"
    write_container(path, [(RecordTag.TELEMETRY, Telemetry(1, [1.0]))])
    data = path.read_bytes()

    # magic, count, tag, section length, channel, value count
    body = data[4 + 4 + 2 + 4 :]
    assert body[:3] == b"\x01\x00\x01"
    # crc16 section: little-endian length, checksum, then float 1.0 little-endian
    assert body[3:7] == b"\x04\x00\x00\x00"
    assert body[9:] == b"\x00\x00\x80\x3f"


def test_corrupted_telemetry(tmp_path: Path) -> None:
    """Test a damaged checksummed section is reported."""
    path = tmp_path / "records.bin"
    write_container(path, [(RecordTag.TELEMETRY, Telemetry(1, [1.0, 2.0]))])
    data = bytearray(path.read_bytes())
    data[-1] ^= 0x40
    path.write_bytes(bytes(data))

    with pytest.raises(DataCorruptedError, match="CRC16"):
        read_container(path)


def test_truncated_file(tmp_path: Path, records) -> None:
    """Test a file cut short inside a record."""
    path = tmp_path / "records.bin"
    write_container(path, records)
    path.write_bytes(path.read_bytes()[:-5])

    with pytest.raises(DecodeError):
        read_container(path)


def test_length_prefixed_nesting() -> None:
    """Test sections nested three deep."""

    def write(encoder: Encoder) -> None:
        encoder.section(
            length_prefix(UInt16),
            lambda a: a.section(
                length_prefix(UInt8),
                lambda b: b.section(length_prefix(UInt8), lambda c: c.push_raw(b"core")),
            ),
        )

    data = Encoder.to_bytes(write)
    assert data == b"\x00\x06\x05\x04core"

    decoder = Decoder.from_bytes(data, max_length=len(data))
    core = decoder.section(
        read_length_prefix(UInt16),
        lambda a: a.section(
            read_length_prefix(UInt8),
            lambda b: b.section(read_length_prefix(UInt8), lambda c: c.pop_bytes(c.remaining)),
        ),
    )
    assert core == b"core"
    assert decoder.remaining == 0
