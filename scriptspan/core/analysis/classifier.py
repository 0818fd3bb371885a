"""
Per-code-point block classification.

All functions are pure; the block table is read-only once loaded, so they
are safe to call from any thread without locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .blocks import BASIC_LATIN, UNKNOWN, block_id, load_block_table

# Related blocks folded into one canonical block before grouping, so that
# accented Latin text is not treated as a foreign script.
DEFAULT_BLOCK_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "LATIN_1_SUPPLEMENT": BASIC_LATIN,
    }
)


def classify(char: str) -> str:
    """Return the block id of a single code point, or UNKNOWN."""
    if len(char) != 1:
        raise ValueError(f"expected a single code point, got {char!r}")
    block = load_block_table().lookup(ord(char))
    return block.name if block else UNKNOWN


def normalize(block: str, aliases: Mapping[str, str] = DEFAULT_BLOCK_ALIASES) -> str:
    return aliases.get(block, block)


class BlockNormalizer:
    """
    Classifies code points and folds related blocks with an alias table.

    Aliases are applied once, not transitively.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        if aliases is None:
            aliases = DEFAULT_BLOCK_ALIASES
        self.aliases: Mapping[str, str] = MappingProxyType(
            {block_id(src): block_id(dst) for src, dst in aliases.items()}
        )

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, str]) -> "BlockNormalizer":
        """Default aliases with ``overrides`` merged on top."""
        merged = dict(DEFAULT_BLOCK_ALIASES)
        merged.update(overrides)
        return cls(merged)

    def block_of(self, char: str) -> str:
        return normalize(classify(char), self.aliases)

    def __call__(self, char: str) -> str:
        return self.block_of(char)

    def __repr__(self) -> str:
        return f"BlockNormalizer({dict(self.aliases)!r})"
