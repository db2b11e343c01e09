"""N64 memory map tables and address resolution."""

from __future__ import annotations

from .resolver import (
    AddressFormatError,
    AddressLocation,
    format_location,
    parse_address,
    resolve,
    short_label,
)
from .table import REGIONS, SEGMENTS, SUBREGIONS, MapEntry, Tier, entries, find_overlaps

__all__ = [
    "AddressFormatError",
    "AddressLocation",
    "MapEntry",
    "REGIONS",
    "SEGMENTS",
    "SUBREGIONS",
    "Tier",
    "entries",
    "find_overlaps",
    "format_location",
    "parse_address",
    "resolve",
    "short_label",
]
