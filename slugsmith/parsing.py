"""Shared parsing helpers for config, environment and CLI value normalization."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer from an int or numeric text token.

    Raises:
        ValueError: If the value is a boolean, non-numeric, or not above zero.
    """

    message = f"`{field_name}` must be a positive integer."
    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(message)
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(message) from exc
    if parsed <= 0:
        raise ValueError(message)
    return parsed


def parse_taken_lines(raw_text: str) -> list[str]:
    """Split a taken-values file into stripped, non-empty, de-duplicated lines.

    Lines starting with `#` are treated as comments. Order of first
    occurrence is preserved.
    """

    values: list[str] = []
    seen: set[str] = set()
    for line in raw_text.splitlines():
        value = normalize_optional_string(line)
        if value is None or value.startswith("#") or value in seen:
            continue
        seen.add(value)
        values.append(value)
    return values
