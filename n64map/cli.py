"""Command-line interface for describing N64 addresses and annotating traces.

One positional argument selects the mode:

1. A ``0x``-prefixed 32-bit hexadecimal number prints where the address lives
   in the memory map.
2. Anything else is treated as an Ares instruction trace whose address column
   is annotated and written to stdout.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from n64map.memmap import AddressFormatError, format_location, parse_address, resolve
from n64map.trace import annotate_path
from n64map.utils.debug import debug_log


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="n64map",
        description="Describe an N64 virtual address or annotate an Ares instruction trace",
    )
    parser.add_argument(
        "target",
        help="0x-prefixed 32-bit address to describe, or path of a trace file to annotate",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    target: str = args.target

    if target.startswith("0x"):
        try:
            address = parse_address(target)
        except AddressFormatError as exc:
            parser.error(f"Invalid address: {exc}")
        debug_log("cli", "describing address %08x", address)
        print(format_location(resolve(address)))
        return 0

    path = Path(target)
    if not path.is_file():
        parser.error(f"Trace file not found: {path}")

    try:
        for line in annotate_path(path):
            print(line)
    except (OSError, UnicodeEncodeError) as exc:
        parser.exit(1, f"n64map: error rewriting lines of file {path}: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
