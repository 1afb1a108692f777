"""Unit tests for shared config and CLI parsing helpers."""

import pytest

from slugsmith.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_int,
    parse_taken_lines,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  alias  ") == "alias"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("1", True),
        ("FALSE", False),
        (" oFf ", False),
        ("0", False),
        (False, False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


@pytest.mark.parametrize(("value", "expected"), [(3, 3), (" 12 ", 12), ("1", 1)])
def test_parse_positive_int_accepts_ints_and_numeric_text(value: object, expected: int) -> None:
    """Positive integers should parse from ints and stripped numeric text."""

    assert parse_positive_int(value, "max_attempts") == expected


@pytest.mark.parametrize("value", [0, -4, "0", "abc", "", None, True, 2.5])
def test_parse_positive_int_rejects_invalid_values(value: object) -> None:
    """Non-positive, non-numeric and boolean values should be rejected."""

    with pytest.raises(ValueError, match=r"`max_attempts` must be a positive integer\."):
        parse_positive_int(value, "max_attempts")


def test_parse_taken_lines_skips_blanks_comments_and_duplicates() -> None:
    """Taken-value files should yield unique stripped values in file order."""

    raw = "# existing slugs\nprivet\n\n  mir  \nprivet\n"

    assert parse_taken_lines(raw) == ["privet", "mir"]
