"""
Mixed-script analysis of identifier local parts.

This module handles:
- Unicode block classification and block folding
- Majority-block partitioning (which code points are the odd ones out)
- Literal pattern compilation and the per-identifier pattern cache
- Composition of the displayable identifier with marked spans

All logic is pure apart from the lock-guarded pattern cache.
"""

from __future__ import annotations

from .blocks import BASIC_LATIN, UNKNOWN, block_names, block_range
from .classifier import DEFAULT_BLOCK_ALIASES, BlockNormalizer, classify, normalize
from .matcher import CacheStats, PatternCache, compile_matcher, find_spans
from .models import Identifier, InvalidIdentifierError, MarkedIdentifier, Span
from .partitioner import FIRST_SEEN, PREFER_LATIN, group_by_block, partition, select_majority
from .rendering import render, utf16_spans

__all__ = [
    "BASIC_LATIN",
    "BlockNormalizer",
    "CacheStats",
    "DEFAULT_BLOCK_ALIASES",
    "FIRST_SEEN",
    "Identifier",
    "InvalidIdentifierError",
    "MarkedIdentifier",
    "PREFER_LATIN",
    "PatternCache",
    "Span",
    "UNKNOWN",
    "block_names",
    "block_range",
    "classify",
    "compile_matcher",
    "find_spans",
    "group_by_block",
    "normalize",
    "partition",
    "render",
    "select_majority",
    "utf16_spans",
]
