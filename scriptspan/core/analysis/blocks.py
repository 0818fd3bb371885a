"""
Unicode block table.

Loads the packaged ``Blocks.txt`` once and answers block lookups with a
bisect over the sorted range starts.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Optional

BLOCKS_RESOURCE = "Blocks.txt"

UNKNOWN = "UNKNOWN"
BASIC_LATIN = "BASIC_LATIN"


def block_id(name: str) -> str:
    """
    Convert a Blocks.txt name to its constant-style id.

    Examples:
        "Latin-1 Supplement" → "LATIN_1_SUPPLEMENT"
        "Greek and Coptic" → "GREEK_AND_COPTIC"
    """
    return re.sub(r"[^A-Z0-9]+", "_", name.strip().upper()).strip("_")


@dataclass(frozen=True, slots=True)
class BlockRange:
    start: int
    end: int
    name: str

    def __contains__(self, codepoint: int) -> bool:
        return self.start <= codepoint <= self.end


@dataclass(frozen=True)
class BlockTable:
    ranges: tuple[BlockRange, ...]
    starts: tuple[int, ...]

    def lookup(self, codepoint: int) -> Optional[BlockRange]:
        idx = bisect.bisect_right(self.starts, codepoint) - 1
        if idx >= 0 and codepoint in self.ranges[idx]:
            return self.ranges[idx]
        return None

    def by_name(self, name: str) -> Optional[BlockRange]:
        wanted = block_id(name)
        for block in self.ranges:
            if block.name == wanted:
                return block
        return None


def parse_blocks(txt: str) -> BlockTable:
    """Parse ``start..end; Name`` lines; '#' starts a comment."""
    ranges: list[BlockRange] = []
    for raw in txt.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        parts = line.split(";", 1)
        if len(parts) < 2:
            continue
        code_range, name = parts[0].strip(), parts[1].strip()
        if ".." in code_range:
            a, b = code_range.split("..", 1)
            start, end = int(a, 16), int(b, 16)
        else:
            start = end = int(code_range, 16)
        ranges.append(BlockRange(start, end, block_id(name)))
    ranges.sort(key=lambda item: item.start)
    return BlockTable(ranges=tuple(ranges), starts=tuple(r.start for r in ranges))


@lru_cache(maxsize=1)
def load_block_table() -> BlockTable:
    source = resources.files("scriptspan.data").joinpath(BLOCKS_RESOURCE)
    if not source.is_file():
        raise FileNotFoundError(f"Missing Unicode block table: {BLOCKS_RESOURCE}")
    return parse_blocks(source.read_text(encoding="utf-8"))


def block_names() -> list[str]:
    return [block.name for block in load_block_table().ranges]


def block_range(name: str) -> Optional[tuple[int, int]]:
    block = load_block_table().by_name(name)
    if block is None:
        return None
    return block.start, block.end
