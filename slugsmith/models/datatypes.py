"""Core datatypes shared across slugsmith modules.

Responsibilities:
- Represent the values exchanged between resolution, behaviour and CLI layers.
- Provide a small mutable record type for the reference integration layer.

Key types:
- `RecordEvent`, `SlugResult`, and `SlugRecord`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class RecordEvent(str, Enum):
    """Record lifecycle points at which a slug may be computed."""

    BEFORE_INSERT = "before_insert"
    BEFORE_UPDATE = "before_update"


@dataclass(frozen=True, slots=True)
class SlugResult:
    """Outcome of one slug resolution.

    Attributes:
        source: Source text the candidate was derived from.
        candidate: Value before uniqueness resolution.
        value: Final value returned to the caller.
        attempts: Number of `exists` predicate calls made.
        transliterated: Whether the candidate came from the transliterator
            rather than a manually entered value.
    """

    source: str
    candidate: str
    value: str
    attempts: int = 0
    transliterated: bool = True

    @property
    def disambiguated(self) -> bool:
        """Return whether a numeric suffix was appended."""

        return self.value != self.candidate


@dataclass(slots=True)
class SlugRecord:
    """Mutable record carrying a source title and a target alias.

    Attributes:
        record_id: Stable identity used to exclude a record's own stored value.
        title: Human-readable source text.
        alias: Slug value; blank until assigned or entered manually.
        errors: Validation messages keyed by field name.
    """

    record_id: str
    title: str = ""
    alias: str = ""
    errors: dict[str, list[str]] = field(default_factory=dict)

    def add_error(self, field_name: str, message: str) -> None:
        """Attach a validation message to a field."""

        self.errors.setdefault(field_name, []).append(message)

    def clear_errors(self) -> None:
        """Drop all validation messages."""

        self.errors = {}

    def has_errors(self) -> bool:
        """Return whether any field carries a validation message."""

        return any(self.errors.values())

    def as_payload(self) -> dict[str, str]:
        """Return the persisted field values of this record."""

        return {"title": self.title, "alias": self.alias}

    @classmethod
    def from_payload(cls, record_id: str, payload: Mapping[str, object]) -> SlugRecord:
        """Build a record from a persisted field mapping."""

        return cls(
            record_id=record_id,
            title=str(payload.get("title") or ""),
            alias=str(payload.get("alias") or ""),
        )
