"""Main CLI entry point for binarycoder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..byte_order import ByteOrder
from ..codec.types import UInt8, UInt16, UInt32, UInt64
from ..config import CoderConfig
from ..exceptions import DecodeError
from .sections import list_sections

PREFIX_KINDS = {"u8": UInt8, "u16": UInt16, "u32": UInt32, "u64": UInt64}


def main() -> int:
    """Main entry point for the binarycoder CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="binarycoder: Byte-Order-Aware Binary Coder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  binarycoder --sections frames.bin                  List u32 big-endian sections
  binarycoder --sections frames.bin --prefix u16 --byte-order little
  binarycoder --host-order                           Show native byte order
  binarycoder --version                              Show version
        """,
    )

    parser.add_argument(
        "--sections",
        metavar="FILE",
        type=str,
        help="List consecutive length-prefixed sections in a binary file",
    )

    parser.add_argument(
        "--prefix",
        choices=sorted(PREFIX_KINDS),
        default="u32",
        help="Width of each length prefix (default: u32)",
    )

    parser.add_argument(
        "--byte-order",
        choices=["little", "big", "host"],
        default="big",
        help="Byte order of the length prefixes (default: big)",
    )

    parser.add_argument(
        "--host-order",
        action="store_true",
        help="Print the host byte order and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"binarycoder {__version__}",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.host_order:
        print(ByteOrder.host().value)
        return 0

    # Handle --sections
    if args.sections:
        file_path = Path(args.sections)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        byte_order = ByteOrder.host() if args.byte_order == "host" else ByteOrder(args.byte_order)
        config = CoderConfig(byte_order=byte_order)
        try:
            list_sections(file_path, PREFIX_KINDS[args.prefix], config)
            return 0
        except DecodeError as e:
            print(f"Error: truncated or malformed section: {e}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
