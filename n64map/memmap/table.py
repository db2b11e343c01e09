"""Static N64 memory map tables.

Values follow the memory map documented at https://n64brew.dev/wiki/Memory_map.
The map is kept as three flat, ordered tiers instead of a tree: segments are
matched against the 32-bit virtual address, regions and subregions against the
physical address. Every range is inclusive at both ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

ADDRESS_MASK = 0xFFFF_FFFF


class Tier(Enum):
    SEGMENT = "segment"
    REGION = "region"
    SUBREGION = "subregion"


@dataclass(frozen=True)
class MapEntry:
    """Named address range at one tier of the memory map."""

    start: int
    end: int
    code: str
    name: str
    tier: Tier

    def contains(self, address: int) -> bool:
        return self.start <= address <= self.end

    def length(self) -> int:
        return self.end - self.start + 1

    def as_pair(self) -> tuple[str, str]:
        return (self.code, self.name)


def _tier(tier: Tier, rows: Sequence[tuple[int, int, str, str]]) -> tuple[MapEntry, ...]:
    return tuple(MapEntry(start, end, code, name, tier) for start, end, code, name in rows)


SEGMENTS: tuple[MapEntry, ...] = _tier(
    Tier.SEGMENT,
    [
        (0x0000_0000, 0x7FFF_FFFF, "U", "KUSEG"),
        (0x8000_0000, 0x9FFF_FFFF, "0", "KSEG0"),
        (0xA000_0000, 0xBFFF_FFFF, "1", "KSEG1"),
        (0xC000_0000, 0xDFFF_FFFF, "S", "KSSEG"),
        (0xE000_0000, 0xFFFF_FFFF, "3", "KSEG3"),
    ],
)

REGIONS: tuple[MapEntry, ...] = _tier(
    Tier.REGION,
    [
        (0x0000_0000, 0x03FF_FFFF, "R", "RDRAM"),
        (0x0400_0000, 0x049F_FFFF, "G", "RCP"),
        (0x0500_0000, 0x1FBF_FFFF, "P", "PI 1/2"),
        (0x1FC0_0000, 0x1FCF_FFFF, "S", "SI"),
        (0x1FD0_0000, 0x7FFF_FFFF, "B", "PI 2/2"),
        (0x8000_0000, 0xFFFF_FFFF, "U", "Unmapped"),
    ],
)

SUBREGIONS: tuple[MapEntry, ...] = _tier(
    Tier.SUBREGION,
    [
        # RDRAM
        (0x0000_0000, 0x03EF_FFFF, "RDRM", "RDRAM memory-space"),
        (0x03F0_0000, 0x03F7_FFFF, "RDRR", "RDRAM registers"),
        (0x03F8_0000, 0x03FF_FFFF, "RDRB", "RDRAM broadcast registers"),
        # RCP
        (0x0400_0000, 0x0400_0FFF, "RSPD", "RSP Data Memory"),
        (0x0400_1000, 0x0400_1FFF, "RSPI", "RSP Instruction Memory"),
        (0x0400_2000, 0x0403_FFFF, "RSPM", "RSP DMEM/IMEM Mirrors"),
        (0x0404_0000, 0x040B_FFFF, "RSPR", "RSP Registers"),
        (0x040C_0000, 0x040F_FFFF, "RCPU", "Unmapped/fatal"),
        (0x0410_0000, 0x041F_FFFF, "RDPC", "RDP Command Registers"),
        (0x0420_0000, 0x042F_FFFF, "RDPS", "RDP Span Registers"),
        (0x0430_0000, 0x043F_FFFF, "InMI", "MIPS Interface"),
        (0x0440_0000, 0x044F_FFFF, "InVI", "Video Interface"),
        (0x0450_0000, 0x045F_FFFF, "InAI", "Audio Interface"),
        (0x0460_0000, 0x046F_FFFF, "InPI", "Peripheral Interface"),
        (0x0470_0000, 0x047F_FFFF, "InRI", "RDRAM Interface"),
        (0x0480_0000, 0x048F_FFFF, "InSI", "Serial Interface"),
        (0x0490_0000, 0x04FF_FFFF, "RCPu", "Unmapped/fatal"),
        # PI
        (0x0500_0000, 0x05FF_FFFF, "NDDR", "N64DD Registers"),
        (0x0600_0000, 0x07FF_FFFF, "NDDI", "N64DD IPL ROM"),
        (0x0800_0000, 0x0FFF_FFFF, "CSRM", "Cartridge SRAM"),
        (0x1000_0000, 0x1FBF_FFFF, "CROM", "Cartridge ROM"),
        # SI
        (0x1FC0_0000, 0x1FC0_07BF, "PIFR", "PIF ROM"),
        (0x1FC0_07C0, 0x1FC0_07FF, "PIFR", "PIF RAM"),
        (0x1FC0_0800, 0x1FCF_FFFF, "RSVD", "Reserved"),
        # PI, second half
        (0x1FD0_0000, 0x1FFF_FFFF, "UPB1", "Unused / PI BUS Domain 1"),
        (0x2000_0000, 0x7FFF_FFFF, "UCPA", "Unused / PI BUS Domain 1 [CPU Accessible]"),
        # No device
        (0x8000_0000, 0xFFFF_FFFF, "UNMP", "Unmapped/fatal"),
    ],
)

_TIERS: dict[Tier, tuple[MapEntry, ...]] = {
    Tier.SEGMENT: SEGMENTS,
    Tier.REGION: REGIONS,
    Tier.SUBREGION: SUBREGIONS,
}


def entries(tier: Tier) -> tuple[MapEntry, ...]:
    """Return the declared entries of ``tier`` in table order."""

    return _TIERS[tier]


def find_overlaps(table: Sequence[MapEntry]) -> list[tuple[MapEntry, MapEntry]]:
    """Return every pair of entries in ``table`` whose ranges intersect."""

    overlaps: list[tuple[MapEntry, MapEntry]] = []
    for index, first in enumerate(table):
        for second in table[index + 1 :]:
            if first.start <= second.end and second.start <= first.end:
                overlaps.append((first, second))
    return overlaps
