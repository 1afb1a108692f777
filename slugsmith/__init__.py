"""Top-level package for slugsmith.

This package derives URL-safe slugs from Russian/English titles and keeps
them unique among existing records. The main entry points are
`transliterate`, `resolve_unique`, `get_value` and `TransliterateBehavior`.
"""

from .behavior import TransliterateBehavior
from .errors import SlugExhaustedError, SlugStageError
from .resolver import get_value, resolve_slug
from .text.transliteration import transliterate
from .uniqueness import resolve_unique, taken_values_predicate

__all__ = [
    "SlugExhaustedError",
    "SlugStageError",
    "TransliterateBehavior",
    "__version__",
    "get_value",
    "resolve_slug",
    "resolve_unique",
    "taken_values_predicate",
    "transliterate",
]

__version__ = "0.1.0"
