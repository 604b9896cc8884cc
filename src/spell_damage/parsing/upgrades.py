"""
Scaling-rule parsers for the "Aux niveaux supérieurs" text of a spell.

Leveled spells scale per spell slot level above their own
("+1d6 par niveau d'emplacement supérieur au 3e"); cantrips scale at
character-level thresholds ("augmentent de 1d10 aux niveaux 5, 11 et 17").
Each rule is a named matcher; matchers are tried in priority order.
"""

import logging
import re

from ..models import CantripUpgrade, DamageComponent, SlotUpgrade
from .dice import DICE_RE, extract_damage_components
from .matchers import PatternMatcher, first_match

logger = logging.getLogger("spell-damage.parsing")

_SLOT_UPGRADE_RE = re.compile(
    r"\+?(\d+d\d+).*?\b(?:par|pour chaque)\b.*?(?:niveau|emplacement)",
    re.IGNORECASE,
)

_LEVEL_CLAUSE_RE = re.compile(
    r"niveaux?\s+(\d+(?:\s*(?:,\s*et|,|et)\s*\d+)*)", re.IGNORECASE
)
_NUMBER_RE = re.compile(r"\d+")
_OPEN_PAREN_RE = re.compile(r"\s*\(")
_PARENTHETICAL_RE = re.compile(r"\([^()]*\)")

_INCREMENT_RE = re.compile(
    r"(?:augmentent?|gagne(?:nt)?)\s+(?:de\s+)?(\d+d\d+)", re.IGNORECASE
)


def strip_parentheticals(text: str) -> str:
    """Blank out every parenthesized aside, innermost first."""
    previous = None
    while previous != text:
        previous, text = text, _PARENTHETICAL_RE.sub(" ", text)
    return text


def _increment(token: str) -> tuple[DamageComponent, ...]:
    return tuple(extract_damage_components(token))


# ---------------------------------------------------------------------------
# Slot-level scaling (leveled spells)
# ---------------------------------------------------------------------------

def parse_slot_upgrade(higher_levels: str | None) -> SlotUpgrade | None:
    """Parse "+NdM ... par niveau/emplacement" scaling.

    Only the matched dice token becomes the increment, applied once per slot
    level above the base level.

    Returns:
        SlotUpgrade, or None when the text has no slot-based scaling
    """
    if not higher_levels:
        return None
    match = _SLOT_UPGRADE_RE.search(higher_levels)
    if not match:
        return None
    components = _increment(match.group(1))
    if not components:
        return None
    logger.debug(f"Slot upgrade: +{components[0].formula} per slot level")
    return SlotUpgrade(components=components, per_levels=1)


# ---------------------------------------------------------------------------
# Character-level scaling (cantrips)
# ---------------------------------------------------------------------------

def _level_numbers(text: str, *, skip_parenthesized: bool) -> list[int]:
    numbers: list[int] = []
    for clause in _LEVEL_CLAUSE_RE.finditer(text):
        offset = clause.start(1)
        for number in _NUMBER_RE.finditer(clause.group(1)):
            end = offset + number.end()
            # "niveau 5 (2d10)": the number introduces a dice aside
            if skip_parenthesized and _OPEN_PAREN_RE.match(text, end):
                continue
            numbers.append(int(number.group(0)))
    return numbers


def _levels_outside_asides(text: str) -> list[int]:
    return _level_numbers(text, skip_parenthesized=True)


def _levels_in_stripped_text(text: str) -> list[int]:
    return _level_numbers(strip_parentheticals(text), skip_parenthesized=False)


THRESHOLD_MATCHERS: tuple[PatternMatcher[list[int]], ...] = (
    PatternMatcher("level-list", _levels_outside_asides),
    PatternMatcher("level-list-without-asides", _levels_in_stripped_text),
)


def _increase_phrase(text: str) -> tuple[DamageComponent, ...] | None:
    match = _INCREMENT_RE.search(text)
    return _increment(match.group(1)) if match else None


def _first_bare_dice(text: str) -> tuple[DamageComponent, ...] | None:
    match = DICE_RE.search(strip_parentheticals(text))
    return _increment(match.group(0)) if match else None


INCREMENT_MATCHERS: tuple[PatternMatcher[tuple[DamageComponent, ...]], ...] = (
    PatternMatcher("increase-by", _increase_phrase),
    PatternMatcher("first-dice-outside-asides", _first_bare_dice),
)


def parse_cantrip_upgrade(higher_levels: str | None) -> CantripUpgrade | None:
    """Parse character-level thresholds and the damage increment of a cantrip.

    Thresholds come from "niveau(x) N[, N et N]" clauses; numbers that open a
    parenthesized aside are skipped unless nothing else is found. The
    increment comes from "augmente(nt) de NdM" / "gagne(nt) NdM", or else
    from the first dice token outside parentheses.

    Returns:
        CantripUpgrade, or None when either the thresholds or the increment
        cannot be found
    """
    if not higher_levels:
        return None
    levels = first_match(THRESHOLD_MATCHERS, higher_levels)
    if not levels:
        return None
    components = first_match(INCREMENT_MATCHERS, higher_levels)
    if not components:
        logger.debug(f"Cantrip thresholds {levels} without a damage increment")
        return None
    return CantripUpgrade(components=components, thresholds=tuple(sorted(set(levels))))
