from __future__ import annotations

import unicodedata

from ..analyzer import IdentifierAnalyzer
from ..core.analysis import (
    block_names,
    block_range,
    classify,
    group_by_block,
    select_majority,
)
from .output import codepoint_label, range_label


def run(analyzer: IdentifierAnalyzer, text: str) -> list[str]:
    """One line per code point: label, name, raw block, folded block and range."""
    lines: list[str] = []
    for char in text:
        raw = classify(char)
        folded = analyzer.normalizer.block_of(char)
        name = unicodedata.name(char, "<unnamed>")
        block = raw if raw == folded else f"{raw} -> {folded}"
        bounds = block_range(raw)
        if bounds is not None:
            block = f"{block} [{range_label(*bounds)}]"
        lines.append(f"{codepoint_label(char):<9} {name:<40} {block}")
    if text:
        groups = group_by_block(text, analyzer.normalizer)
        majority = select_majority(groups, analyzer.tie_break)
        counts = ", ".join(f"{block}={len(chars)}" for block, chars in groups.items())
        lines.append(f"Majority: {majority} ({counts})")
    return lines


def list_blocks() -> list[str]:
    lines = []
    for name in block_names():
        start, end = block_range(name)
        lines.append(f"{range_label(start, end):<20} {name}")
    return lines
