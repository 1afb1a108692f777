"""Unit tests for Cyrillic-to-ASCII slug transliteration."""

from __future__ import annotations

import pytest

from slugsmith.text.transliteration import (
    TRANSLITERATION_TABLE,
    substitute_table,
    transliterate,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("Title", "title"),
        ("привет мир", "privet-mir"),
        ("Иван Ильин", "ivan-ilin"),
        ("Василий", "vasiliy"),
        ("Hello---World!!!", "hello-world"),
        ("---test---", "test"),
    ],
)
def test_transliterate_matches_reference_examples(text: str, expected: str) -> None:
    """Transliteration should reproduce the documented reference outputs."""

    assert transliterate(text) == expected


def test_transliterate_applies_digraphs_before_single_letters() -> None:
    """Digraph entries should win over the letters they start with."""

    assert transliterate("красный") == "krasnyi"
    assert transliterate("Дарья") == "darya"
    assert transliterate("пьеса") == "pyesa"
    assert transliterate("бульён") == "bulyon"


def test_transliterate_drops_soft_and_hard_signs_without_stray_hyphens() -> None:
    """Soft and hard signs map to nothing and leave no separator behind."""

    assert transliterate("подъезд") == "podezd"
    assert transliterate("соль") == "sol"
    assert transliterate("Ь Ъ") == ""


def test_transliterate_maps_multi_character_letters() -> None:
    """Letters with multi-character replacements should expand in place."""

    assert transliterate("Щука жёлтая") == "schuka-zheltaya"
    assert transliterate("Чехов Шишкин Юрий") == "chehov-shishkin-yuriy"


def test_transliterate_keeps_ascii_letters_digits_and_hyphens() -> None:
    """Pure ASCII alphanumerics should pass through lowercased."""

    assert transliterate("ABC-123") == "abc-123"
    assert transliterate("Quiz 2024") == "quiz-2024"


def test_transliterate_replaces_each_foreign_character_then_collapses() -> None:
    """Unknown characters become hyphens and runs of hyphens collapse to one."""

    assert transliterate("Ça va? Oui!") == "a-va-oui"
    assert transliterate("tab\tand\nnewline") == "tab-and-newline"
    assert transliterate("a — b") == "a-b"


def test_transliterate_returns_empty_for_untransliterable_input() -> None:
    """Input without table or slug characters should produce an empty string."""

    assert transliterate("!!! ??? ***") == ""
    assert transliterate("日本語") == ""
    assert transliterate("   ") == ""


def test_transliterate_lowercases_uppercase_cyrillic() -> None:
    """Uppercase Cyrillic should be lowercased before table substitution."""

    assert transliterate("МОСКВА") == "moskva"
    assert transliterate("ЁЛКА") == "elka"


def test_transliterate_output_is_slug_alphabet_only() -> None:
    """Output should only contain lowercase ASCII letters, digits and inner hyphens."""

    slug = transliterate("  Съешь же ещё этих мягких французских булок, да выпей чаю! 100% ")

    assert slug == "sesh-zhe-esche-etih-myagkih-francuzskih-bulok-da-vypey-chayu-100"
    assert slug == slug.lower()
    assert not slug.startswith("-")
    assert not slug.endswith("-")
    assert "--" not in slug


def test_transliteration_table_lists_digraphs_ahead_of_their_prefixes() -> None:
    """Every multi-character key should precede any single-letter key it starts with."""

    positions = {source: index for index, (source, _) in enumerate(TRANSLITERATION_TABLE)}
    for source, index in positions.items():
        if len(source) > 1:
            assert index < positions[source[0]]


def test_substitute_table_does_not_normalize_case() -> None:
    """Raw table substitution should leave unmapped characters untouched."""

    assert substitute_table("ий X") == "iy-X"
