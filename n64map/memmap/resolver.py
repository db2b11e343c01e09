"""Address resolution against the static N64 memory map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from n64map.utils.debug import debug_log

from .table import ADDRESS_MASK, REGIONS, SEGMENTS, SUBREGIONS, MapEntry

# Clears the segment bits that select cached/uncached access.
PHYSICAL_MASK = 0x1FFF_FFFF

PLACEHOLDER = "?"


class AddressFormatError(ValueError):
    """Raised when an address literal is not a ``0x``-prefixed 32-bit value."""


@dataclass(frozen=True)
class AddressLocation:
    """Segment, region and subregions that contain a single address."""

    virtual_address: int
    physical_address: int
    segment: tuple[str, str] | None
    region: tuple[str, str] | None
    subregions: tuple[tuple[str, str], ...]


def _first_match(table: Iterable[MapEntry], address: int) -> tuple[str, str] | None:
    # First declared entry wins should a tier ever overlap.
    for entry in table:
        if entry.contains(address):
            return entry.as_pair()
    return None


def resolve(address: int) -> AddressLocation:
    """Locate ``address`` in the memory map.

    The segment is looked up with the virtual address; regions and
    subregions use the physical address. Addresses outside every range of a
    tier simply leave that tier empty.
    """

    virtual = address & ADDRESS_MASK
    physical = virtual & PHYSICAL_MASK

    location = AddressLocation(
        virtual_address=virtual,
        physical_address=physical,
        segment=_first_match(SEGMENTS, virtual),
        region=_first_match(REGIONS, physical),
        subregions=tuple(entry.as_pair() for entry in SUBREGIONS if entry.contains(physical)),
    )
    debug_log("resolve", "%08x -> %s", virtual, short_label(location))
    return location


def short_label(location: AddressLocation, placeholder: str = PLACEHOLDER) -> str:
    """Return the compact ``<segment><region>.<subregions>`` label."""

    segment = location.segment[0] if location.segment else placeholder
    region = location.region[0] if location.region else placeholder
    subregions = ".".join(code for code, _ in location.subregions)
    return f"{segment}{region}.{subregions}"


def format_location(location: AddressLocation) -> str:
    """Render ``location`` as a multi-line structured dump."""

    lines = [
        "AddressLocation(",
        f"    virtual_address={location.virtual_address} ({location.virtual_address:#010x}),",
        f"    physical_address={location.physical_address} ({location.physical_address:#010x}),",
        f"    segment={location.segment!r},",
        f"    region={location.region!r},",
    ]
    if location.subregions:
        lines.append("    subregions=[")
        lines.extend(f"        {pair!r}," for pair in location.subregions)
        lines.append("    ],")
    else:
        lines.append("    subregions=[],")
    lines.append(")")
    return "\n".join(lines)


def parse_address(text: str) -> int:
    """Parse a ``0x``-prefixed hexadecimal literal into a 32-bit address."""

    if not text.startswith("0x"):
        raise AddressFormatError(f"address must start with 0x: {text!r}")
    digits = text[2:]
    try:
        value = int(digits, 16)
    except ValueError:
        raise AddressFormatError(f"invalid hexadecimal address: {text!r}") from None
    # int() also accepts signs, underscores, whitespace and non-ASCII digits
    if not (digits.isascii() and digits.isalnum()) or value > ADDRESS_MASK:
        raise AddressFormatError(f"not a 32-bit address: {text!r}")
    return value
