"""
Composition of the displayable identifier.

Styling is left to the caller: spans are returned as plain offsets.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import LOCAL_DELIMITER, RESOURCE_DELIMITER, Identifier, MarkedIdentifier, Span


def render(identifier: Identifier, spans: Iterable[Span] = ()) -> MarkedIdentifier:
    """
    Build ``local@domain/resource`` with ``spans`` over the local part.

    Without a local part the text starts at the domain and nothing is
    marked. The resource is only appended after something else was rendered.
    """
    parts: list[str] = []
    marked: tuple[Span, ...] = ()
    if identifier.local:
        local = identifier.local
        marked = tuple(span for span in spans if span.end <= len(local))
        parts.append(local)
        parts.append(LOCAL_DELIMITER)
    if identifier.domain:
        parts.append(identifier.domain)
    if parts and identifier.resource:
        parts.append(RESOURCE_DELIMITER)
        parts.append(identifier.resource)
    return MarkedIdentifier(text="".join(parts), spans=marked)


def utf16_spans(text: str, spans: Iterable[Span]) -> list[Span]:
    """
    Convert code-point spans over ``text`` to UTF-16 code-unit offsets.

    Renderers that count in UTF-16 (browsers, Java/Android text) need these;
    astral characters take two units.
    """
    offsets = [0]
    for char in text:
        offsets.append(offsets[-1] + (2 if ord(char) > 0xFFFF else 1))
    return [Span(offsets[span.start], offsets[span.end]) for span in spans]
