"""
Pattern compilation, matching and the per-identifier pattern cache.
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from threading import Lock

from .models import Identifier, Span

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100

# Empty lookahead negation: fails at every position, including the end.
NEVER_MATCHES = re.compile(r"(?!)")


def compile_matcher(code_points: Iterable[str]) -> re.Pattern[str]:
    """
    Compile a literal alternation over ``code_points``.

    An empty set must not become an empty pattern, which would match the
    empty string at every position.
    """
    escaped = [re.escape(cp) for cp in code_points if cp]
    if not escaped:
        return NEVER_MATCHES
    return re.compile("|".join(escaped))


def find_spans(pattern: re.Pattern[str], text: str | None) -> list[Span]:
    """Scan left to right and collect every non-empty match."""
    if not text:
        return []
    return [
        Span(match.start(), match.end())
        for match in pattern.finditer(text)
        if match.start() < match.end()
    ]


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    evictions: int = 0


class PatternCache:
    """
    Bounded LRU cache of compiled patterns keyed by identifier.

    One lock covers the whole lookup/compile/insert/evict sequence, so at most
    one pattern is ever compiled per identifier.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"cache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.stats = CacheStats()
        self._lock = Lock()
        self._entries: OrderedDict[Identifier, re.Pattern[str]] = OrderedDict()

    def get_or_compile(
        self,
        identifier: Identifier,
        factory: Callable[[Identifier], re.Pattern[str]],
    ) -> re.Pattern[str]:
        with self._lock:
            pattern = self._entries.get(identifier)
            if pattern is not None:
                self._entries.move_to_end(identifier)
                self.stats.hits += 1
                logger.debug("Pattern cache hit for %s", identifier)
                return pattern
            self.stats.misses += 1
            pattern = factory(identifier)
            self._entries[identifier] = pattern
            if len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                self.stats.evictions += 1
                logger.debug("Pattern cache evicted %s", evicted)
            return pattern

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def keys(self) -> list[Identifier]:
        """Cached identifiers, least recently used first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.stats = CacheStats()
