"""Text transliteration components.

This package turns human-readable Russian/English titles into ASCII slug
candidates.
"""

from .transliteration import TRANSLITERATION_TABLE, substitute_table, transliterate

__all__ = ["TRANSLITERATION_TABLE", "substitute_table", "transliterate"]
