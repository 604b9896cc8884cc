"""
Damage compilers: concrete damage formulas for a cast level or character level.

Both compilers fold the base damage and the scaled increments into a fresh
mapping keyed by (die size, damage type), then render the terms in order of
first appearance. The SpellDamageInfo they read is never modified.
"""

import logging
import re
from typing import Iterable, Mapping, Sequence

from .models import DamageComponent, SpellDamageInfo
from .vocabulary import MAX_SPELL_LEVEL, DamageType, UpgradeType

logger = logging.getLogger("spell-damage.compiler")

_SLOT_KEY_RE = re.compile(r"^level(\d+)$")


def merge_components(components: Iterable[DamageComponent]) -> list[DamageComponent]:
    """Add up components sharing a die size and damage type.

    Example: [1d6 feu, 2d8, 1d6 feu] → [2d6 feu, 2d8]
    """
    totals: dict[tuple[int, DamageType | None], int] = {}
    for component in components:
        totals[component.merge_key] = totals.get(component.merge_key, 0) + component.dice_count
    return [
        DamageComponent(dice_count=count, dice_type=dice_type, damage_type=damage_type)
        for (dice_type, damage_type), count in totals.items()
    ]


def _scaled(pattern: Sequence[DamageComponent] | None, multiplier: int) -> list[DamageComponent]:
    if multiplier < 0:
        logger.debug(f"Clamping negative upgrade multiplier {multiplier} to 0")
    if not pattern or multiplier <= 0:
        return []
    return [increment.scaled(multiplier) for increment in pattern]


def format_damage(
    components: Sequence[DamageComponent],
    has_modifier: bool = False,
    ability_modifier: int | None = None,
) -> str:
    """Render terms as "2d8 feu + 1d6 radiant", plus a signed modifier when it applies."""
    result = " + ".join(component.label() for component in components)
    if has_modifier and ability_modifier is not None:
        result += f" {ability_modifier:+d}"
    return result


def _compile(info: SpellDamageInfo, multiplier: int, ability_modifier: int | None) -> str:
    components = merge_components([*info.base_damage, *_scaled(info.upgrade_pattern, multiplier)])
    return format_damage(components, info.has_modifier, ability_modifier)


def calculate_slot_damage(
    info: SpellDamageInfo,
    base_spell_level: int,
    cast_level: int,
    ability_modifier: int | None = None,
) -> str:
    """Damage formula of a leveled spell cast with a slot of ``cast_level``.

    Each full ``upgrade_per_levels`` step above ``base_spell_level`` adds one
    increment.

    Returns:
        The formula, or "" when the spell deals no dice damage
    """
    if not info.is_damage_spell:
        return ""
    multiplier = 0
    if info.upgrade_type == UpgradeType.PER_SLOT_LEVEL and cast_level > base_spell_level:
        multiplier = (cast_level - base_spell_level) // (info.upgrade_per_levels or 1)
    return _compile(info, multiplier, ability_modifier)


def calculate_cantrip_damage(
    info: SpellDamageInfo,
    character_level: int,
    ability_modifier: int | None = None,
) -> str:
    """Damage formula of a cantrip cast by a character of ``character_level``.

    Every threshold at or below the character level adds one increment.

    Returns:
        The formula, or "" when the spell deals no dice damage
    """
    if not info.is_damage_spell:
        return ""
    multiplier = 0
    if info.upgrade_type == UpgradeType.CHARACTER_LEVEL and info.character_level_thresholds:
        multiplier = sum(1 for threshold in info.character_level_thresholds if threshold <= character_level)
    return _compile(info, multiplier, ability_modifier)


def describe_spell_damage(
    info: SpellDamageInfo,
    spell_level: int,
    level: int,
    ability_modifier: int | None = None,
) -> str:
    """Pick the compiler matching the spell.

    ``level`` is the character level for a cantrip and the cast level for a
    leveled spell.
    """
    if spell_level == 0:
        return calculate_cantrip_damage(info, level, ability_modifier)
    return calculate_slot_damage(info, spell_level, level, ability_modifier)


def get_available_cast_levels(
    spell_level: int,
    max_player_spell_level: int,
    has_upgrade: bool,
    *,
    ceiling: int = MAX_SPELL_LEVEL,
) -> list[int]:
    """Slot levels a spell can usefully be cast at.

    Cantrips and spells that do not scale are only offered at their own
    level; otherwise every level from the spell's up to the caster's
    highest slot, never beyond ``ceiling``.

    Example:
        >>> get_available_cast_levels(3, 9, True)
        [3, 4, 5, 6, 7, 8, 9]
    """
    if spell_level == 0 or not has_upgrade:
        return [spell_level]
    return list(range(spell_level, min(max_player_spell_level, ceiling) + 1))


def highest_slot_level(spell_slots: Mapping[str, int] | None) -> int:
    """Highest slot level with at least one slot, 0 when there is none.

    Args:
        spell_slots: Slot counts keyed "level1" ... "level9"
    """
    highest = 0
    for key, count in (spell_slots or {}).items():
        match = _SLOT_KEY_RE.match(key)
        if match and count and count > 0:
            highest = max(highest, int(match.group(1)))
    return highest
