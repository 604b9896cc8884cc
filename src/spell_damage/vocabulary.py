"""
Closed vocabularies used by the spell-damage analyzer.

Damage types and abilities are fixed enumerations; their values are the
French display names found in spell text. Accented and plural variants are
resolved to these members by :mod:`spell_damage.terminology`.
"""

from enum import Enum


class DamageType(str, Enum):
    """D&D 5e damage types, valued by their French name."""
    ACID = "acide"
    BLUDGEONING = "contondant"
    FIRE = "feu"
    COLD = "froid"
    FORCE = "force"
    LIGHTNING = "foudre"
    NECROTIC = "nécrotique"
    PIERCING = "perçant"
    POISON = "poison"
    PSYCHIC = "psychique"
    RADIANT = "radiant"
    THUNDER = "tonnerre"
    SLASHING = "tranchant"


class Ability(str, Enum):
    """The six ability scores, valued by their French name."""
    STRENGTH = "Force"
    DEXTERITY = "Dextérité"
    CONSTITUTION = "Constitution"
    INTELLIGENCE = "Intelligence"
    WISDOM = "Sagesse"
    CHARISMA = "Charisme"


class UpgradeType(str, Enum):
    """How a spell's damage scales."""
    NONE = "none"
    PER_SLOT_LEVEL = "per_slot_level"
    CHARACTER_LEVEL = "character_level"


# French three-letter abbreviation → ability
ABILITY_ABBREVIATIONS: dict[str, Ability] = {
    "FOR": Ability.STRENGTH,
    "DEX": Ability.DEXTERITY,
    "CON": Ability.CONSTITUTION,
    "INT": Ability.INTELLIGENCE,
    "SAG": Ability.WISDOM,
    "CHA": Ability.CHARISMA,
}

# Category names used in the vocabulary YAML, mapped to their enum
TERM_CATEGORIES: dict[str, type[Enum]] = {
    "damage_type": DamageType,
    "ability": Ability,
}

# Highest spell slot level in 5e
MAX_SPELL_LEVEL = 9


__all__ = [
    "DamageType",
    "Ability",
    "UpgradeType",
    "ABILITY_ABBREVIATIONS",
    "TERM_CATEGORIES",
    "MAX_SPELL_LEVEL",
]
