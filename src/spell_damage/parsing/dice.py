"""
Dice-damage extraction from French spell text.

Finds every ``NdM`` token in order of appearance, together with the damage
type word printed next to it: "2d8 dégâts de feu", "2d8 de feu", "2d8 feu",
"1d8 dégâts nécrotiques", "4d4 dégâts d'acide".
"""

import logging
import re

from ..config import AnalyzerConfig
from ..models import DamageComponent
from ..terminology import default_resolver
from ..terminology.resolver import TermResolver
from ..vocabulary import DamageType

logger = logging.getLogger("spell-damage.parsing")

_WORD = r"[^\W\d_]+"

# A bare dice token; digits on either side belong to another number
DICE_RE = re.compile(r"(?<!\d)(\d+)d(\d+)(?!\d)", re.IGNORECASE)

# Dice token, optional "dégâts", optional "de"/"d'", candidate type word
_DAMAGE_RE = re.compile(
    r"(?<!\d)(\d+)d(\d+)(?!\d)"
    r"\s*(?:dégâts?\s+)?"
    r"(?:de\s+|d['’])?"
    rf"({_WORD})?",
    re.IGNORECASE,
)

# After "NdM dégâts", the type may follow as "de X" a little further on
_TYPE_AFTER_DEGATS_RE = re.compile(rf"\s*(?:de\s+|d['’])?({_WORD})", re.IGNORECASE)
_DEGATS_LOOKAHEAD = 30

# Window vocabulary deciding whether a dice token is damage at all
_DAMAGE_CONTEXT_RE = re.compile(r"dégâts?|subir|subit|inflige|perd")
_NOT_DAMAGE_CONTEXT_RE = re.compile(r"soustraire|ajouter|bonus|malus|prochain|suivant")

# "jet de" opens a roll bonus unless it is a saving throw; the lookahead runs
# on the full text since the window may cut "sauvegarde" short
_ROLL_IN_WINDOW_RE = re.compile(r"jet de\b")
_ROLL_BONUS_RE = re.compile(r"jet de(?!\s+sauvegarde)\s", re.IGNORECASE)

_DAMAGE_KEYWORDS = (
    DICE_RE,
    re.compile(r"dégâts?", re.IGNORECASE),
    re.compile(r"inflige", re.IGNORECASE),
    re.compile(r"subit", re.IGNORECASE),
    re.compile(r"perd.*points? de vie", re.IGNORECASE),
)


def mentions_damage(description: str | None) -> bool:
    """Whether the text talks about damage at all (dice, "dégâts", "inflige"...).

    Looser than :func:`extract_damage_components`: a spell dealing a flat
    amount ("perd 10 points de vie") mentions damage without any dice.
    """
    if not description:
        return False
    return any(regex.search(description) for regex in _DAMAGE_KEYWORDS)


def _in_damage_context(text: str, match: re.Match, config: AnalyzerConfig) -> bool:
    start = max(0, match.start() - config.context_before)
    context = text[start:match.end() + config.context_after].lower()
    if _NOT_DAMAGE_CONTEXT_RE.search(context):
        return False
    for roll in _ROLL_IN_WINDOW_RE.finditer(context):
        if _ROLL_BONUS_RE.match(text, start + roll.start()):
            return False
    return bool(_DAMAGE_CONTEXT_RE.search(context))


def _damage_type_for(text: str, match: re.Match, resolver: TermResolver) -> DamageType | None:
    word = match.group(3)
    if not word:
        return None
    damage_type = resolver.resolve_damage_type(word)
    if damage_type is not None:
        return damage_type
    if word.lower() in ("dégâts", "dégât"):
        after = text[match.end():match.end() + _DEGATS_LOOKAHEAD]
        type_match = _TYPE_AFTER_DEGATS_RE.match(after)
        if type_match:
            return resolver.resolve_damage_type(type_match.group(1))
    return None


def extract_damage_components(
    text: str | None,
    *,
    require_context: bool = False,
    config: AnalyzerConfig | None = None,
) -> list[DamageComponent]:
    """Extract the dice-damage terms of a text, in order of appearance.

    Each dice token is evaluated on its own: a type word is never carried
    over to the next token. Tokens with zero dice or a die smaller than d2
    are ignored.

    Args:
        text: Spell description or a bare dice expression
        require_context: Keep a token only if the words around it talk about
            damage and not about a roll bonus ("1d4 à ajouter au prochain jet")
        config: Analyzer settings (context window, vocabulary)

    Returns:
        List of DamageComponent, empty when the text has no dice
    """
    if not text:
        return []
    config = config or AnalyzerConfig()
    resolver = default_resolver(config.vocabulary_path)

    components: list[DamageComponent] = []
    for match in _DAMAGE_RE.finditer(text):
        dice_count, dice_type = int(match.group(1)), int(match.group(2))
        if dice_count < 1 or dice_type < 2:
            logger.debug(f"Ignoring degenerate dice {match.group(0)!r}")
            continue
        if require_context and not _in_damage_context(text, match, config):
            logger.debug(f"Ignoring {dice_count}d{dice_type}: no damage context")
            continue
        components.append(DamageComponent(
            dice_count=dice_count,
            dice_type=dice_type,
            damage_type=_damage_type_for(text, match, resolver),
        ))
    return components
