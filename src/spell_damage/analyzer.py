"""
Spell-damage analysis: turn a French spell description into a SpellDamageInfo.

The analyzer always extracts the base damage and runs both detectors, then
routes the "Aux niveaux supérieurs" text to exactly one scaling parser:
cantrips (spell level 0) to the character-level parser, leveled spells to
the slot-level parser.
"""

import logging
from typing import Sequence

from .config import AnalyzerConfig
from .models import DamageComponent, SpellDamageInfo
from .parsing import (
    detect_modifier,
    extract_damage_components,
    is_attack_roll,
    parse_cantrip_upgrade,
    parse_slot_upgrade,
)
from .vocabulary import UpgradeType

logger = logging.getLogger("spell-damage.analyzer")


def anchor_increments(
    increments: Sequence[DamageComponent],
    base_damage: Sequence[DamageComponent],
) -> tuple[DamageComponent, ...]:
    """Give typeless increments the damage type of the base dice they extend.

    "+1d6 par niveau" on a spell dealing "2d6 dégâts de feu" adds fire dice.
    An increment is only anchored when every base component with the same die
    size carries one and the same damage type.
    """
    anchored = []
    for increment in increments:
        if increment.damage_type is None:
            same_die = [c.damage_type for c in base_damage if c.dice_type == increment.dice_type]
            if same_die and None not in same_die and len(set(same_die)) == 1:
                increment = increment.model_copy(update={"damage_type": same_die[0]})
        anchored.append(increment)
    return tuple(anchored)


def analyze_spell_damage(
    description: str | None,
    higher_levels: str | None = None,
    spell_level: int = 0,
    *,
    config: AnalyzerConfig | None = None,
) -> SpellDamageInfo:
    """Analyze a spell's damage and scaling rules.

    Args:
        description: Spell body text
        higher_levels: "Aux niveaux supérieurs" text, if any
        spell_level: 0 for a cantrip, 1-9 otherwise
        config: Analyzer settings

    Returns:
        SpellDamageInfo; a spell without dice, modifier or scaling is a
        valid result, not an error
    """
    config = config or AnalyzerConfig()
    base_damage = tuple(extract_damage_components(
        description, require_context=config.require_damage_context, config=config
    ))
    modifier = detect_modifier(description)
    is_cantrip = spell_level == 0

    upgrade: dict = {}
    if higher_levels:
        if is_cantrip:
            cantrip_upgrade = parse_cantrip_upgrade(higher_levels)
            if cantrip_upgrade:
                upgrade = {
                    "upgrade_type": UpgradeType.CHARACTER_LEVEL,
                    "upgrade_pattern": anchor_increments(cantrip_upgrade.components, base_damage),
                    "character_level_thresholds": cantrip_upgrade.thresholds,
                }
        else:
            slot_upgrade = parse_slot_upgrade(higher_levels)
            if slot_upgrade:
                upgrade = {
                    "upgrade_type": UpgradeType.PER_SLOT_LEVEL,
                    "upgrade_pattern": anchor_increments(slot_upgrade.components, base_damage),
                    "upgrade_per_levels": slot_upgrade.per_levels,
                }

    info = SpellDamageInfo(
        is_damage_spell=bool(base_damage),
        is_attack_roll=is_attack_roll(description),
        base_damage=base_damage,
        has_modifier=modifier.has_modifier,
        modifier_ability=modifier.ability,
        **upgrade,
    )
    logger.debug(
        f"Analyzed level {spell_level} spell: {len(base_damage)} damage term(s), "
        f"scaling {info.upgrade_type.value}"
    )
    return info
