from __future__ import annotations

from ..config import DisplaySettings
from ..core.analysis import MarkedIdentifier

PLAIN_OPEN = "[["
PLAIN_CLOSE = "]]"


def highlight(marked: MarkedIdentifier, opener: str, closer: str) -> str:
    """Wrap every marked span of ``marked.text`` in ``opener``/``closer``."""
    pieces: list[str] = []
    cursor = 0
    for span in marked.spans:
        pieces.append(marked.text[cursor : span.start])
        pieces.append(f"{opener}{span.slice(marked.text)}{closer}")
        cursor = span.end
    pieces.append(marked.text[cursor:])
    return "".join(pieces)


def styled(marked: MarkedIdentifier, display: DisplaySettings, *, plain: bool = False) -> str:
    if plain:
        return highlight(marked, PLAIN_OPEN, PLAIN_CLOSE)
    return highlight(marked, display.highlight, display.reset)


def codepoint_label(char: str) -> str:
    return f"U+{ord(char):04X}"


def range_label(start: int, end: int) -> str:
    return f"U+{start:04X}..U+{end:04X}"
