from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from .config import Settings
from .core.analysis import (
    FIRST_SEEN,
    BlockNormalizer,
    Identifier,
    MarkedIdentifier,
    PatternCache,
    Span,
    compile_matcher,
    find_spans,
    partition,
    render,
)
from .core.analysis.matcher import DEFAULT_CAPACITY
from .core.analysis.partitioner import TIE_BREAKS

logger = logging.getLogger(__name__)


@dataclass
class IdentifierAnalyzer:
    """
    Flags mixed-script local parts and marks them for display.

    Owns the pattern cache; create one per process (or per test) and hand it
    to whatever renders identifiers.
    """

    normalizer: BlockNormalizer = field(default_factory=BlockNormalizer)
    tie_break: str = FIRST_SEEN
    cache: PatternCache = field(default_factory=lambda: PatternCache(DEFAULT_CAPACITY))

    def __post_init__(self) -> None:
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie-break policy: {self.tie_break!r}")

    @classmethod
    def create(cls, settings: Settings) -> "IdentifierAnalyzer":
        analyzer_settings = settings.analyzer
        return cls.with_options(
            cache_capacity=analyzer_settings.cache_capacity,
            block_aliases=analyzer_settings.block_aliases,
            tie_break=analyzer_settings.tie_break,
        )

    @classmethod
    def with_options(
        cls,
        *,
        cache_capacity: int = DEFAULT_CAPACITY,
        block_aliases: Optional[Mapping[str, str]] = None,
        tie_break: str = FIRST_SEEN,
    ) -> "IdentifierAnalyzer":
        normalizer = (
            BlockNormalizer.with_overrides(block_aliases)
            if block_aliases
            else BlockNormalizer()
        )
        return cls(
            normalizer=normalizer,
            tie_break=tie_break,
            cache=PatternCache(cache_capacity),
        )

    def minority(self, identifier: Identifier) -> tuple[str, ...]:
        return partition(identifier.local, self.normalizer, self.tie_break)

    def _compile(self, identifier: Identifier) -> re.Pattern[str]:
        logger.debug("Compiling pattern for %s", identifier)
        return compile_matcher(self.minority(identifier))

    def match(self, identifier: Identifier) -> list[Span]:
        """Spans of minority code points in ``identifier.local``, ascending."""
        if not identifier.local:
            return []
        pattern = self.cache.get_or_compile(identifier, self._compile)
        return find_spans(pattern, identifier.local)

    def mark(self, identifier: Identifier) -> MarkedIdentifier:
        return render(identifier, self.match(identifier))

    def mark_text(self, text: str) -> MarkedIdentifier:
        return self.mark(Identifier.parse(text))
