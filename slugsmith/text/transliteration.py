"""Russian Cyrillic to ASCII slug transliteration.

Responsibilities:
- Lowercase source text and substitute Cyrillic letters with ASCII sequences.
- Reduce everything else to a hyphen-separated `[a-z0-9-]` token stream.

The table is applied as ordered literal substring replacement, so the
digraph entries must stay ahead of the single letters they start with.
"""

from __future__ import annotations

import re

TRANSLITERATION_TABLE: tuple[tuple[str, str], ...] = (
    # digraphs
    ("ий", "iy"),
    ("ый", "yi"),
    ("ье", "ye"),
    ("ьё", "yo"),
    # letters
    ("а", "a"),
    ("б", "b"),
    ("в", "v"),
    ("г", "g"),
    ("д", "d"),
    ("е", "e"),
    ("ё", "e"),
    ("ж", "zh"),
    ("з", "z"),
    ("и", "i"),
    ("й", "y"),
    ("к", "k"),
    ("л", "l"),
    ("м", "m"),
    ("н", "n"),
    ("о", "o"),
    ("п", "p"),
    ("р", "r"),
    ("с", "s"),
    ("т", "t"),
    ("у", "u"),
    ("ф", "f"),
    ("х", "h"),
    ("ц", "c"),
    ("ч", "ch"),
    ("ш", "sh"),
    ("щ", "sch"),
    ("ь", ""),
    ("ы", "y"),
    ("ъ", ""),
    ("э", "e"),
    ("ю", "yu"),
    ("я", "ya"),
    (" ", "-"),
)

_NON_SLUG_CHARACTER = re.compile(r"[^a-zA-Z0-9\-]")
_HYPHEN_RUN = re.compile(r"-{2,}")


def substitute_table(text: str) -> str:
    """Apply every table entry in order as a literal substring replacement."""

    for source, replacement in TRANSLITERATION_TABLE:
        text = text.replace(source, replacement)
    return text


def transliterate(text: str) -> str:
    """Return the ASCII slug candidate for `text`.

    Empty input, or input made only of characters that are neither
    transliterable nor `[A-Za-z0-9-]`, produces an empty string.
    """

    substituted = substitute_table(text.lower())
    hyphenated = _NON_SLUG_CHARACTER.sub("-", substituted)
    collapsed = _HYPHEN_RUN.sub("-", hyphenated)
    return collapsed.strip("-")
