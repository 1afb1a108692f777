"""Top-level slug value resolution.

Responsibilities:
- Decide between a manually entered value and a transliterated candidate.
- Route non-empty candidates through uniqueness resolution when enabled.
"""

from __future__ import annotations

from typing import Callable

from .models.datatypes import SlugResult
from .text.transliteration import transliterate
from .uniqueness import ExistsPredicate, resolve_unique


def get_value(
    current_target_value: str | None,
    source_value: str | None,
    validate_unique: bool,
    exists: ExistsPredicate,
    max_attempts: int | None = None,
) -> str:
    """Return the value to assign to a record's target field.

    A non-empty current target value is used verbatim and is never
    transliterated again. Empty candidates skip uniqueness resolution.
    """

    return resolve_slug(
        current_target_value,
        source_value,
        validate_unique,
        exists,
        max_attempts=max_attempts,
    ).value


def resolve_slug(
    current_target_value: str | None,
    source_value: str | None,
    validate_unique: bool,
    exists: ExistsPredicate,
    max_attempts: int | None = None,
    on_collision: Callable[[str, int], None] | None = None,
) -> SlugResult:
    """Resolve a slug and report how the final value was reached."""

    source = source_value or ""
    if current_target_value:
        candidate = current_target_value
        transliterated = False
    else:
        candidate = transliterate(source)
        transliterated = True

    if not candidate or not validate_unique:
        return SlugResult(
            source=source,
            candidate=candidate,
            value=candidate,
            transliterated=transliterated,
        )

    calls = 0

    def _counting_exists(value: str) -> bool:
        nonlocal calls
        calls += 1
        return exists(value)

    value = resolve_unique(
        candidate,
        _counting_exists,
        max_attempts=max_attempts,
        on_collision=on_collision,
    )
    return SlugResult(
        source=source,
        candidate=candidate,
        value=value,
        attempts=calls,
        transliterated=transliterated,
    )
