"""Basic smoke tests for project wiring."""

import slugsmith
from slugsmith import TransliterateBehavior, get_value, resolve_unique, transliterate


def test_public_api_is_exported() -> None:
    """Top-level package should expose the core operations."""

    assert set(slugsmith.__all__) >= {
        "transliterate",
        "resolve_unique",
        "get_value",
        "TransliterateBehavior",
    }
    assert slugsmith.__version__


def test_core_operations_compose() -> None:
    """Transliteration and uniqueness resolution should compose end to end."""

    taken = {"privet-mir"}

    assert transliterate("Привет, мир!") == "privet-mir"
    assert resolve_unique(transliterate("Привет, мир!"), taken.__contains__) == "privet-mir-1"
    assert get_value("", "Привет, мир!", True, taken.__contains__) == "privet-mir-1"
    assert TransliterateBehavior().to_field == "alias"
