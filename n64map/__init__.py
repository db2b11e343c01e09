"""Tools describing addresses in the N64 memory map.

``memmap`` holds the static map and the resolver, ``trace`` rewrites Ares
instruction traces with memory map labels, and ``cli`` ties both to the
command line used by ``run.py``.
"""

from __future__ import annotations

from . import memmap, trace, utils

__all__: list[str] = [
    "memmap",
    "trace",
    "utils",
]
