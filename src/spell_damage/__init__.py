"""
Spell-damage analyzer - parse French D&D 5e spell text into damage models
and compile damage formulas for a cast level or character level.
"""

from .analyzer import analyze_spell_damage, anchor_increments
from .compiler import (
    calculate_cantrip_damage,
    calculate_slot_damage,
    describe_spell_damage,
    format_damage,
    get_available_cast_levels,
    highest_slot_level,
    merge_components,
)
from .config import AnalyzerConfig
from .models import CantripUpgrade, DamageComponent, ModifierInfo, SlotUpgrade, SpellDamageInfo
from .parsing import (
    detect_modifier,
    extract_damage_components,
    is_attack_roll,
    mentions_damage,
    parse_cantrip_upgrade,
    parse_slot_upgrade,
)
from .vocabulary import Ability, DamageType, UpgradeType

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("spell-damage")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "analyze_spell_damage",
    "anchor_increments",
    "calculate_slot_damage",
    "calculate_cantrip_damage",
    "describe_spell_damage",
    "format_damage",
    "merge_components",
    "get_available_cast_levels",
    "highest_slot_level",
    "extract_damage_components",
    "mentions_damage",
    "detect_modifier",
    "is_attack_roll",
    "parse_slot_upgrade",
    "parse_cantrip_upgrade",
    "AnalyzerConfig",
    "DamageComponent",
    "ModifierInfo",
    "SlotUpgrade",
    "CantripUpgrade",
    "SpellDamageInfo",
    "Ability",
    "DamageType",
    "UpgradeType",
]
