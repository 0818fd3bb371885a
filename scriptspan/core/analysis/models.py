"""
Domain models for mixed-script analysis.

These are pure data models with no dependencies beyond the standard library.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Optional

LOCAL_DELIMITER = "@"
RESOURCE_DELIMITER = "/"


class InvalidIdentifierError(ValueError):
    """Raised when identifier text or parts cannot form a valid identifier."""


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = unicodedata.normalize("NFC", value)
    return value or None


def _clean_domain(value: Optional[str]) -> Optional[str]:
    value = _clean(value)
    if value is None:
        return None
    value = value.lower()
    if value.endswith("."):
        value = value[:-1]
    return value or None


@dataclass(frozen=True)
class Identifier:
    """
    An address-like identifier: ``local@domain/resource``.

    Every part is optional. Values are normalized on construction (NFC, the
    domain lower-cased without a trailing dot, empty strings become None), so
    equality and hashing compare normalized values.

    Example:
        Identifier.parse("Alice@Example.COM/phone")
        - local: "Alice"
        - domain: "example.com"
        - resource: "phone"
    """
    local: Optional[str] = None
    """The part before '@'; the only part inspected for mixed scripts"""

    domain: Optional[str] = None
    """The host part"""

    resource: Optional[str] = None
    """Everything after the first '/'; may itself contain '@' and '/'"""

    def __post_init__(self) -> None:
        local = _clean(self.local)
        domain = _clean_domain(self.domain)
        resource = _clean(self.resource)
        for name, value in (("local", local), ("domain", domain)):
            if value is None:
                continue
            if LOCAL_DELIMITER in value or RESOURCE_DELIMITER in value:
                raise InvalidIdentifierError(
                    f"{name} part may not contain '{LOCAL_DELIMITER}' or "
                    f"'{RESOURCE_DELIMITER}': {value!r}"
                )
        object.__setattr__(self, "local", local)
        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "resource", resource)

    @classmethod
    def parse(cls, text: str) -> "Identifier":
        """
        Split ``local@domain/resource`` text into an identifier.

        The resource starts at the first '/', the local part ends at the last
        '@' before it. A domain is required.
        """
        if not text or not text.strip():
            raise InvalidIdentifierError("identifier text is empty")
        text = text.strip()
        head, sep, resource = text.partition(RESOURCE_DELIMITER)
        local: Optional[str] = None
        domain = head
        if LOCAL_DELIMITER in head:
            local, _, domain = head.rpartition(LOCAL_DELIMITER)
        if sep and not resource:
            raise InvalidIdentifierError(f"identifier has an empty resource: {text!r}")
        identifier = cls(local=local, domain=domain, resource=resource if sep else None)
        if identifier.domain is None:
            raise InvalidIdentifierError(f"identifier has no domain: {text!r}")
        return identifier

    @classmethod
    def from_parts(
        cls, local: Optional[str], domain: str, resource: Optional[str] = None
    ) -> "Identifier":
        identifier = cls(local=local, domain=domain, resource=resource)
        if identifier.domain is None:
            raise InvalidIdentifierError(f"identifier has no domain: {domain!r}")
        return identifier

    def bare(self) -> "Identifier":
        """The same identifier without its resource."""
        if self.is_bare:
            return self
        return Identifier(local=self.local, domain=self.domain)

    @property
    def is_bare(self) -> bool:
        return self.resource is None

    def __str__(self) -> str:
        text = self.domain or ""
        if self.local:
            text = f"{self.local}{LOCAL_DELIMITER}{text}"
        if self.resource:
            text = f"{text}{RESOURCE_DELIMITER}{self.resource}"
        return text


@dataclass(frozen=True, slots=True)
class Span:
    """A half-open ``[start, end)`` range of code-point offsets."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True)
class MarkedIdentifier:
    """
    A rendered identifier plus the spans to highlight in it.

    The local part is rendered first, so spans found in the local part index
    the rendered text unchanged.
    """
    text: str
    """Displayable identifier, e.g. pаypal@example.com/phone"""

    spans: tuple[Span, ...] = field(default_factory=tuple)
    """Marked ranges, ascending and non-overlapping"""

    @property
    def has_anomalies(self) -> bool:
        return bool(self.spans)

    def marked_text(self) -> list[str]:
        return [span.slice(self.text) for span in self.spans]
