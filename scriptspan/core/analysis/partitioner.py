"""
Majority-block partitioning of an identifier's local part.

The most frequent block is assumed legitimate; every code point from any
other block is a minority code point and gets flagged. Only mixing is
flagged: a local part written entirely in one foreign block yields nothing.

All functions are pure and never mutate their input.
"""

from __future__ import annotations

import logging
from typing import Optional

from .blocks import BASIC_LATIN
from .classifier import BlockNormalizer

logger = logging.getLogger(__name__)

FIRST_SEEN = "first_seen"
PREFER_LATIN = "prefer_latin"
TIE_BREAKS = (FIRST_SEEN, PREFER_LATIN)

_DEFAULT_NORMALIZER = BlockNormalizer()


def group_by_block(
    local: str, normalizer: Optional[BlockNormalizer] = None
) -> dict[str, list[str]]:
    """
    Group the code points of ``local`` by normalized block.

    Groups keep duplicates and are ordered by each block's first occurrence.
    """
    normalizer = normalizer or _DEFAULT_NORMALIZER
    groups: dict[str, list[str]] = {}
    for char in local:
        groups.setdefault(normalizer.block_of(char), []).append(char)
    return groups


def select_majority(groups: dict[str, list[str]], tie_break: str = FIRST_SEEN) -> str:
    """
    Pick the block with the strictly largest group.

    The candidate starts as BASIC_LATIN with a count of zero, so an
    identifier without any Latin still elects one of its own blocks. With
    ``first_seen`` a tie goes to the block that occurs first in the text;
    with ``prefer_latin`` a tie involving BASIC_LATIN goes to BASIC_LATIN.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"unknown tie-break policy: {tie_break!r}")
    majority = BASIC_LATIN
    size = 0
    for block, code_points in groups.items():
        if len(code_points) > size:
            size = len(code_points)
            majority = block
    if tie_break == PREFER_LATIN and len(groups.get(BASIC_LATIN, ())) == size:
        majority = BASIC_LATIN
    return majority


def partition(
    local: Optional[str],
    normalizer: Optional[BlockNormalizer] = None,
    tie_break: str = FIRST_SEEN,
) -> tuple[str, ...]:
    """
    Return the distinct minority code points of ``local``.

    Order is first occurrence, which keeps compiled patterns reproducible.
    """
    if not local:
        return ()
    groups = group_by_block(local, normalizer)
    majority = select_majority(groups, tie_break)
    minority: dict[str, None] = {}
    for block, code_points in groups.items():
        if block == majority:
            continue
        for char in code_points:
            minority.setdefault(char, None)
    if minority:
        logger.debug(
            "Majority block %s for %r; minority %s",
            majority,
            local,
            ", ".join(f"U+{ord(ch):04X}" for ch in minority),
        )
    return tuple(minority)
