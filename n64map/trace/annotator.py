"""Rewrite the address column of Ares CPU instruction traces.

A CPU trace line starts with a three letter component tag followed by the
sign-extended 64-bit program counter::

    CPU  ffffffffa40005f0  sw      t0{$f0f0f000},v0+$3dd0{$a003e300}

The counter is masked to 32 bits, resolved, and replaced by a fixed-width
memory map label plus the ``0x`` address. Every other line, including device
I/O logs, passes through untouched. Values inside operand braces are left
alone since they are data as often as addresses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from n64map.memmap.resolver import PLACEHOLDER, resolve, short_label
from n64map.utils.debug import debug_log

TRACE_LINE = re.compile(r"^([A-Z]{3})\s*([a-f0-9]{16})\s*(.*)$")


def _strip_line_ending(line: str) -> str:
    # Only "\n" ends a line; a lone "\r" inside a line is data.
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


@dataclass(frozen=True)
class TraceFormat:
    """Layout of annotated trace lines."""

    label_width: int = 12
    placeholder: str = PLACEHOLDER
    uppercase: bool = True


class TraceAnnotator:
    """Stateless per-line rewriter bound to a :class:`TraceFormat`."""

    def __init__(self, fmt: TraceFormat | None = None) -> None:
        self._fmt = fmt or TraceFormat()

    @property
    def format(self) -> TraceFormat:
        return self._fmt

    def annotate(self, line: str) -> str:
        match = TRACE_LINE.match(line)
        if match is None:
            return line

        tag, raw_address, rest = match.groups()
        address = int(raw_address, 16) & 0xFFFF_FFFF
        location = resolve(address)
        if location.segment is None or location.region is None:
            debug_log("trace", "unmapped address %08x in line %r", address, line)

        label = short_label(location, self._fmt.placeholder)
        if self._fmt.uppercase:
            label = label.upper()
        return f"{tag} {label:<{self._fmt.label_width}} {address:#08x} {rest}"

    def annotate_lines(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield self.annotate(_strip_line_ending(line))

    def annotate_path(self, path: Path) -> Iterator[str]:
        debug_log("trace", "annotating %s", path)
        with Path(path).open("r", encoding="utf-8", errors="replace", newline="\n") as handle:
            yield from self.annotate_lines(handle)


_DEFAULT = TraceAnnotator()


def annotate(line: str) -> str:
    """Annotate a single trace line with the default format."""

    return _DEFAULT.annotate(line)


def annotate_lines(lines: Iterable[str]) -> Iterator[str]:
    """Lazily annotate ``lines``, one output line per input line."""

    return _DEFAULT.annotate_lines(lines)


def annotate_path(path: Path) -> Iterator[str]:
    """Stream the annotated lines of the trace file at ``path``."""

    return _DEFAULT.annotate_path(path)
