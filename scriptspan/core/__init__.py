"""
Core analysis layer for scriptspan.

``core.analysis`` holds the block table, the majority partitioner, the
pattern cache and the identifier models. Nothing here reads configuration
or writes output; the CLI and ``IdentifierAnalyzer`` wire it together.
"""

from __future__ import annotations

__all__ = []
