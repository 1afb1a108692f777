"""Uniqueness resolution for slug candidates.

Responsibilities:
- Append an incrementing `-N` disambiguator until a value is free.
- Build `exists` predicates from plain collections of taken values.

Key public functions:
- `resolve_unique`: probe candidate, `candidate-1`, `candidate-2`, ...
- `taken_values_predicate`: wrap an iterable of taken values as a predicate.
"""

from __future__ import annotations

from typing import Callable, Iterable

from .errors import SlugExhaustedError
from .parsing import normalize_optional_string

ExistsPredicate = Callable[[str], bool]


def resolve_unique(
    candidate: str,
    exists: ExistsPredicate,
    max_attempts: int | None = None,
    on_collision: Callable[[str, int], None] | None = None,
) -> str:
    """Return the first of `candidate`, `candidate-1`, ... not reported as taken.

    Args:
        candidate: Base value; suffixes are always appended to this value,
            never to a previously suffixed one.
        exists: Predicate called once per value tried, in order.
        max_attempts: Optional bound on taken values before giving up.
            `None` keeps probing until `exists` returns false.
        on_collision: Optional callback receiving each taken value and the
            1-based attempt number.

    Raises:
        SlugExhaustedError: If `max_attempts` taken values were seen.
    """

    value = candidate
    counter = 1
    while exists(value):
        if on_collision is not None:
            on_collision(value, counter)
        if max_attempts is not None and counter >= max_attempts:
            raise SlugExhaustedError(candidate, counter)
        value = f"{candidate}-{counter}"
        counter += 1
    return value


def taken_values_predicate(values: Iterable[object]) -> ExistsPredicate:
    """Build an `exists` predicate over a snapshot of taken values.

    Blank values are ignored and surrounding whitespace is stripped.
    """

    taken = frozenset(
        normalized
        for normalized in (normalize_optional_string(value) for value in values)
        if normalized is not None
    )

    def _exists(candidate: str) -> bool:
        return candidate in taken

    return _exists
