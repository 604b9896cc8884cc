"""
Lexical parsers for French spell text.
"""

from .detectors import detect_modifier, is_attack_roll
from .dice import extract_damage_components, mentions_damage
from .matchers import PatternMatcher, first_match
from .upgrades import parse_cantrip_upgrade, parse_slot_upgrade, strip_parentheticals

__all__ = [
    "extract_damage_components",
    "mentions_damage",
    "detect_modifier",
    "is_attack_roll",
    "parse_slot_upgrade",
    "parse_cantrip_upgrade",
    "strip_parentheticals",
    "PatternMatcher",
    "first_match",
]
