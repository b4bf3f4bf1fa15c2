#!/usr/bin/env python3
"""Basic usage example for binarycoder.

This example demonstrates:
1. Defining a type that writes and reads itself
2. Encoding into length-prefixed, checksummed sections
3. Decoding back with bounded sub-decoders
4. Calculating encoded sizes
"""

from __future__ import annotations

import io
import uuid

from binarycoder import (
    ByteOrder,
    Decoder,
    Encoder,
    Float32,
    UInt8,
    UInt16,
    Uuid,
    checksummed_prefix,
    encoded_size,
    read_checksummed_prefix,
    verified,
)


class StatusReport:
    """Vehicle status report with a fixed binary layout."""

    def __init__(self, vehicle_id: uuid.UUID, depth_m: float, battery_pct: int) -> None:
        self.vehicle_id = vehicle_id
        self.depth_m = depth_m
        self.battery_pct = battery_pct

    def encode(self, encoder: Encoder) -> None:
        encoder.push(self.vehicle_id, Uuid)
        encoder.push_value(self.depth_m, Float32)
        encoder.push_value(self.battery_pct, UInt8)

    @classmethod
    def decode(cls, decoder: Decoder) -> StatusReport:
        return cls(decoder.pop(Uuid), decoder.pop_value(Float32), decoder.pop_value(UInt8))


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("binarycoder Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Creating status reports...")
    reports = [
        StatusReport(uuid.uuid4(), 25.5, 87),
        StatusReport(uuid.uuid4(), 102.25, 40),
    ]
    for report in reports:
        print(f"   {report.vehicle_id}: {report.depth_m} m, {report.battery_pct}%")
    print()

    print("2. Calculating sizes...")
    size = encoded_size(reports[0].encode)
    print(f"   One report: {size} bytes")
    print()

    print("3. Encoding (little-endian, CRC-16 per report)...")
    buffer = io.BytesIO()
    encoder = Encoder(buffer, ByteOrder.LITTLE)
    encoder.push_value(len(reports), UInt16)
    for report in reports:
        encoder.section(checksummed_prefix("crc16"), report.encode)

    data = buffer.getvalue()
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    print("4. Decoding...")
    decoder = Decoder(io.BytesIO(data), ByteOrder.LITTLE, max_length=len(data))
    count = decoder.pop_value(UInt16)
    decoded = [
        decoder.contextual_section(
            read_checksummed_prefix("crc16"), verified(StatusReport.decode, "crc16")
        )
        for _ in range(count)
    ]
    for report in decoded:
        print(f"   {report.vehicle_id}: {report.depth_m} m, {report.battery_pct}%")
    print()

    print("5. Verifying round-trip...")
    matches = all(
        (a.vehicle_id, a.depth_m, a.battery_pct) == (b.vehicle_id, b.depth_m, b.battery_pct)
        for a, b in zip(reports, decoded)
    )
    print(f"   {'✓ Round-trip successful' if matches else '✗ Round-trip mismatch'}")
    print(f"   Bytes left: {decoder.remaining}")


if __name__ == "__main__":
    main()
