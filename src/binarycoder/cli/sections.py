"""Section listing CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from ..codec.decoder import Decoder
from ..codec.types import FixedWidthInteger, UInt32
from ..config import CoderConfig
from ..exceptions import InsufficientDataError, NoMoreDataError
from ..streams import ByteSource


@dataclass(frozen=True)
class SectionInfo:
    """Location of one length-prefixed section.

    Attributes:
        index: Position of the section in the stream (0-based)
        offset: Byte offset of the section header
        header_size: Size of the length prefix in bytes
        length: Size of the body in bytes
    """

    index: int
    offset: int
    header_size: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.header_size + self.length


def scan_sections(
    source: ByteSource,
    prefix: FixedWidthInteger = UInt32,
    config: Optional[CoderConfig] = None,
) -> Iterator[SectionInfo]:
    """Walk consecutive length-prefixed sections without keeping their bodies.

    Args:
        source: Stream positioned at the first section header
        prefix: Width of each length prefix
        config: Byte order and budget to read with

    Yields:
        One SectionInfo per complete section

    Raises:
        DecodeError: If the stream ends inside a header or body
    """
    decoder = Decoder.from_config(source, config or CoderConfig())
    offset = 0
    index = 0
    while decoder.remaining != 0:
        try:
            length = decoder.pop_value(prefix)
        except NoMoreDataError:
            return
        try:
            decoder.with_sub_decoder(length, lambda sub: None)
        except NoMoreDataError as err:
            raise InsufficientDataError(
                f"Stream ended after header of section {index}"
            ) from err
        info = SectionInfo(index=index, offset=offset, header_size=prefix.size, length=length)
        yield info
        offset = info.end
        index += 1


def list_sections(file_path: Path, prefix: FixedWidthInteger, config: CoderConfig) -> None:
    """Print the sections of a binary file.

    Args:
        file_path: Path to the binary file
        prefix: Width of each length prefix
        config: Byte order to read with
    """
    print("|" * 7, "binarycoder: Byte-Order-Aware Binary Coder", "|" * 7)
    print(f"File: {file_path}")
    print(f"Length prefix: {prefix!r} ({config.byte_order.value}-endian)")
    print()

    total = 0
    with open(file_path, "rb") as source:
        for info in scan_sections(source, prefix, config):
            label = f"{info.index}. offset {info.offset}"
            dots = "." * max(1, 40 - len(label) - len(str(info.length)))
            print(f"        {label}{dots}{info.length} bytes")
            total += 1

    print()
    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"{total} section{'s' if total != 1 else ''} found.")
