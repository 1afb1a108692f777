"""Unit tests for `-N` disambiguation of slug candidates."""

from __future__ import annotations

import pytest

from slugsmith.errors import SlugExhaustedError
from slugsmith.uniqueness import resolve_unique, taken_values_predicate


def test_resolve_unique_returns_candidate_when_free() -> None:
    """A free candidate should be returned unchanged after one check."""

    calls: list[str] = []

    def _never_taken(value: str) -> bool:
        calls.append(value)
        return False

    assert resolve_unique("foo", _never_taken) == "foo"
    assert calls == ["foo"]


def test_resolve_unique_appends_counter_to_original_candidate() -> None:
    """Suffixes should be appended to the base candidate, not accumulated."""

    taken = {"foo", "foo-1"}

    assert resolve_unique("foo", lambda value: value in taken) == "foo-2"


def test_resolve_unique_probes_values_in_order() -> None:
    """Every taken value should be probed exactly once, in counter order."""

    taken = {"post", "post-1", "post-2", "post-3"}
    calls: list[str] = []

    def _exists(value: str) -> bool:
        calls.append(value)
        return value in taken

    result = resolve_unique("post", _exists)

    assert result == "post-4"
    assert calls == ["post", "post-1", "post-2", "post-3", "post-4"]


def test_resolve_unique_skips_gaps_only_from_the_start() -> None:
    """The first free value wins even if later suffixes are taken."""

    taken = {"news", "news-2", "news-3"}

    assert resolve_unique("news", lambda value: value in taken) == "news-1"


def test_resolve_unique_reports_collisions_to_callback() -> None:
    """The collision callback should receive each taken value and attempt number."""

    seen: list[tuple[str, int]] = []
    taken = {"a", "a-1"}

    resolve_unique("a", lambda value: value in taken, on_collision=lambda v, n: seen.append((v, n)))

    assert seen == [("a", 1), ("a-1", 2)]


def test_resolve_unique_raises_when_attempt_bound_is_reached() -> None:
    """A bounded search should stop with `SlugExhaustedError` after N taken values."""

    calls: list[str] = []

    def _always_taken(value: str) -> bool:
        calls.append(value)
        return True

    with pytest.raises(SlugExhaustedError) as exc_info:
        resolve_unique("loop", _always_taken, max_attempts=3)

    assert exc_info.value.candidate == "loop"
    assert exc_info.value.attempts == 3
    assert calls == ["loop", "loop-1", "loop-2"]


def test_resolve_unique_bound_allows_success_on_last_permitted_probe() -> None:
    """A free value found within the bound should be returned normally."""

    taken = {"x", "x-1"}

    assert resolve_unique("x", lambda value: value in taken, max_attempts=3) == "x-2"


def test_taken_values_predicate_ignores_blank_values_and_strips() -> None:
    """Taken-value predicates should ignore blanks and compare stripped values."""

    exists = taken_values_predicate(["  foo ", "", None, "bar"])

    assert exists("foo") is True
    assert exists("bar") is True
    assert exists("") is False
    assert exists("baz") is False


def test_taken_values_predicate_snapshots_input() -> None:
    """Later changes to the source collection should not affect the predicate."""

    values = ["foo"]
    exists = taken_values_predicate(values)
    values.append("bar")

    assert exists("bar") is False
