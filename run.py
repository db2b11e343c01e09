"""Command-line entry point for the N64 memory map tools.

Usage::

    python run.py 0xB0000000      # describe an address
    python run.py trace.log       # annotate an Ares instruction trace
"""

from __future__ import annotations

import sys

from n64map.cli import main

if __name__ == "__main__":
    sys.exit(main())
