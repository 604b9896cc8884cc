"""
French terminology resolution for damage types and abilities.

Provides O(1) lookup of French spell-text words with accent normalization,
mapping plural and unaccented spellings onto the closed vocabularies.
"""

from .models import TermEntry
from .resolver import DEFAULT_VOCABULARY_PATH, TermResolver, VocabularyError, default_resolver

__all__ = ["TermEntry", "TermResolver", "VocabularyError", "default_resolver", "DEFAULT_VOCABULARY_PATH"]
