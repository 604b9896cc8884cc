"""
Term resolver with O(1) lookup and accent normalization.
"""

import logging
import unicodedata
from enum import Enum
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..vocabulary import TERM_CATEGORIES, Ability, DamageType
from .models import TermEntry

logger = logging.getLogger("spell-damage.terminology")

DEFAULT_VOCABULARY_PATH = Path(__file__).parent / "fr_terms.yaml"


class VocabularyError(Exception):
    """Raised when a vocabulary file cannot be turned into a complete term table."""


class TermResolver:
    """Resolves French damage-type and ability words to their enum members.

    The resolver builds an internal lookup dictionary mapping all normalized
    variants (canonical, en, fr_primary, all fr_variants) to their TermEntry
    objects, so "Nécrotiques", "necrotique" and "nécrotique" all resolve to
    the same entry.

    Example:
        >>> resolver = TermResolver()
        >>> resolver.load_yaml(DEFAULT_VOCABULARY_PATH)
        >>> resolver.resolve_damage_type("Nécrotiques")
        <DamageType.NECROTIC: 'nécrotique'>
        >>> resolver.resolve_ability("sagesse")
        <Ability.WISDOM: 'Sagesse'>
    """

    def __init__(self) -> None:
        """Initialize an empty resolver."""
        # (category, normalized variant) → entry; "force" is both a damage type and an ability
        self._lookup: dict[tuple[str, str], TermEntry] = {}

    def _normalize(self, text: str) -> str:
        """Normalize text for accent-insensitive, case-insensitive matching.

        Uses Unicode NFD normalization to decompose accented characters,
        then strips combining marks. Also lowercases and strips whitespace.

        Example:
            >>> resolver._normalize("  Dextérité ")
            'dexterite'
        """
        nfkd = unicodedata.normalize("NFD", text.lower().strip())
        return "".join(c for c in nfkd if not unicodedata.combining(c))

    def load_yaml(self, path: Path) -> None:
        """Load the term table from a YAML file.

        Expected YAML format:
            terms:
              - canonical: fire
                category: damage_type
                en: Fire
                fr_primary: feu
                fr_variants: [feux]

        Every member of DamageType and Ability must be covered by exactly
        the entry whose canonical key is the member name in lowercase.

        Args:
            path: Path to YAML file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            VocabularyError: If the terms key is missing, an entry is invalid,
                names an unknown canonical term, or an enum member is not covered
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or "terms" not in data:
            raise VocabularyError(f"{path}: YAML file must contain a 'terms' key")

        self._lookup.clear()
        covered: set[Enum] = set()

        for term_data in data["terms"]:
            try:
                entry = TermEntry(**term_data)
            except (TypeError, ValidationError) as e:
                raise VocabularyError(f"{path}: invalid term entry {term_data!r}: {e}") from e

            member = self._member_for(entry)
            if member is None:
                raise VocabularyError(
                    f"{path}: unknown {entry.category!r} term {entry.canonical!r}"
                )
            covered.add(member)

            for variant in (entry.canonical, entry.en, entry.fr_primary, *entry.fr_variants):
                normalized = self._normalize(variant)
                if normalized:
                    self._lookup[(entry.category, normalized)] = entry

        missing = [m.name for m in (*DamageType, *Ability) if m not in covered]
        if missing:
            raise VocabularyError(f"{path}: no entry for {', '.join(missing)}")

        logger.debug(f"Loaded {len(self._lookup)} term variants from {path}")

    @staticmethod
    def _member_for(entry: TermEntry) -> Enum | None:
        enum_cls = TERM_CATEGORIES.get(entry.category)
        if enum_cls is None:
            return None
        return enum_cls.__members__.get(entry.canonical.upper())

    def resolve(self, text: str, category: str) -> TermEntry | None:
        """Resolve a single word within a category, or None for unknown words.

        Args:
            text: Word to resolve (any variant, any case, with or without accents)
            category: "damage_type" or "ability"
        """
        if not text:
            return None
        return self._lookup.get((category, self._normalize(text)))

    def resolve_damage_type(self, text: str) -> DamageType | None:
        """Resolve a word to a DamageType, or None when it names no damage type."""
        entry = self.resolve(text, "damage_type")
        return DamageType[entry.canonical.upper()] if entry else None

    def resolve_ability(self, text: str) -> Ability | None:
        """Resolve a word to an Ability, or None when it names no ability."""
        entry = self.resolve(text, "ability")
        return Ability[entry.canonical.upper()] if entry else None


@lru_cache(maxsize=8)
def default_resolver(path: Path | None = None) -> TermResolver:
    """Return a shared resolver loaded from ``path`` or the packaged vocabulary."""
    resolver = TermResolver()
    resolver.load_yaml(path or DEFAULT_VOCABULARY_PATH)
    return resolver
