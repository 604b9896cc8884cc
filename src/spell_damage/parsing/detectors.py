"""
Attribute detectors: attack rolls and ability modifiers.
"""

import re

from ..models import ModifierInfo
from ..terminology import default_resolver
from ..vocabulary import ABILITY_ABBREVIATIONS, Ability
from .matchers import PatternMatcher, first_match

# Conditional phrasings: the attack roll ends or triggers the spell, the caster
# does not roll one to cast it ("Amis" ends "si vous effectuez un jet d'attaque")
_ATTACK_EXCLUSIONS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"si vous effectuez un jet d'attaque",
    r"lorsque vous effectuez un jet d'attaque",
    r"quand vous effectuez un jet d'attaque",
    r"après avoir effectué un jet d'attaque",
))

_ATTACK_PHRASES = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"effectuez une attaque.*de sort",
    r"faites un jet d'attaque.*de sort",
    r"réalisez une attaque.*de sort",
    r"attaque de sort.*distance",
    r"attaque de sort.*au corps à corps",
    r"jet d'attaque de sort",
))

_LONG_MODIFIER_RE = re.compile(r"modificateur de ([^\W\d_]+)", re.IGNORECASE)
_SHORT_MODIFIER_RE = re.compile(
    rf"\+\s*({'|'.join(ABILITY_ABBREVIATIONS)})\b", re.IGNORECASE
)


def is_attack_roll(description: str | None) -> bool:
    """Whether casting the spell requires the caster to make a spell attack roll."""
    if not description:
        return False
    if any(regex.search(description) for regex in _ATTACK_EXCLUSIONS):
        return False
    return any(regex.search(description) for regex in _ATTACK_PHRASES)


def _long_form(text: str) -> Ability | None:
    resolver = default_resolver()
    for match in _LONG_MODIFIER_RE.finditer(text):
        ability = resolver.resolve_ability(match.group(1))
        if ability is not None:
            return ability
    return None


def _short_form(text: str) -> Ability | None:
    match = _SHORT_MODIFIER_RE.search(text)
    return ABILITY_ABBREVIATIONS[match.group(1).upper()] if match else None


MODIFIER_MATCHERS: tuple[PatternMatcher[Ability], ...] = (
    PatternMatcher("modifier-long-form", _long_form),
    PatternMatcher("modifier-short-form", _short_form),
)


def detect_modifier(description: str | None) -> ModifierInfo:
    """Detect whether an ability modifier is added to the damage.

    Tries "modificateur de <Caractéristique>" first, then "+ <ABR>"
    (FOR, DEX, CON, INT, SAG, CHA).

    Example:
        >>> detect_modifier("2d8 + votre modificateur de Charisme")
        ModifierInfo(has_modifier=True, ability=<Ability.CHARISMA: 'Charisme'>)
    """
    ability = first_match(MODIFIER_MATCHERS, description or "")
    if ability is None:
        return ModifierInfo()
    return ModifierInfo(has_modifier=True, ability=ability)
