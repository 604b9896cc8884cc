"""
Spell-damage MCP server
Exposes the French spell-damage analyzer as FastMCP tools.
"""

import logging
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field

from .analyzer import analyze_spell_damage
from .compiler import describe_spell_damage, get_available_cast_levels
from .config import AnalyzerConfig
from .models import SpellDamageInfo
from .terminology import VocabularyError
from .vocabulary import MAX_SPELL_LEVEL, UpgradeType

logger = logging.getLogger("spell-damage")

dotenv_loaded = load_dotenv()

config = AnalyzerConfig.from_env()

logging.basicConfig(
    level=config.log_level,
    )

if not dotenv_loaded:
    logger.debug(".env file not found, using process environment only")

mcp = FastMCP(
    name="spell-damage"
)


def format_analysis(info: SpellDamageInfo, spell_level: int) -> str:
    """Render a SpellDamageInfo as the markdown block returned by analyze_spell."""
    if not info.is_damage_spell:
        return "✨ No dice damage found in this spell."

    lines = [f"**Damage:** {' + '.join(c.label() for c in info.base_damage)}"]
    lines.append(f"**Attack roll:** {'yes' if info.is_attack_roll else 'no'}")
    if info.has_modifier and info.modifier_ability:
        lines.append(f"**Modifier:** {info.modifier_ability.value}")

    if info.upgrade_type == UpgradeType.PER_SLOT_LEVEL:
        increment = " + ".join(c.label() for c in info.upgrade_pattern or ())
        lines.append(
            f"**Scaling:** +{increment} per {info.upgrade_per_levels} slot level(s) above {spell_level}"
        )
    elif info.upgrade_type == UpgradeType.CHARACTER_LEVEL:
        increment = " + ".join(c.label() for c in info.upgrade_pattern or ())
        thresholds = ", ".join(str(t) for t in info.character_level_thresholds or ())
        lines.append(f"**Scaling:** +{increment} at character levels {thresholds}")
    else:
        lines.append("**Scaling:** none")
    return "\n".join(lines)


@mcp.tool
def analyze_spell(
    description: Annotated[str, Field(description="Spell description (French)")],
    higher_levels: Annotated[str | None, Field(description="'Aux niveaux supérieurs' text")] = None,
    spell_level: Annotated[int, Field(ge=0, le=MAX_SPELL_LEVEL, description="Spell level, 0 for a cantrip")] = 0,
) -> str:
    """Analyze the damage dice, modifier and scaling rule of a spell."""
    try:
        info = analyze_spell_damage(description, higher_levels, spell_level, config=config)
    except (VocabularyError, OSError) as e:
        logger.error(f"Vocabulary unavailable: {e}")
        return f"❌ Vocabulary unavailable: {e}"
    return format_analysis(info, spell_level)


@mcp.tool
def spell_damage(
    description: Annotated[str, Field(description="Spell description (French)")],
    level: Annotated[int, Field(ge=0, le=20, description="Cast level for a leveled spell, character level for a cantrip")],
    higher_levels: Annotated[str | None, Field(description="'Aux niveaux supérieurs' text")] = None,
    spell_level: Annotated[int, Field(ge=0, le=MAX_SPELL_LEVEL, description="Spell level, 0 for a cantrip")] = 0,
    ability_modifier: Annotated[int | None, Field(description="Caster's ability modifier")] = None,
) -> str:
    """Compute the damage formula of a spell at a given cast or character level."""
    if spell_level > 0 and level < spell_level:
        return f"❌ A level {spell_level} spell cannot be cast with a level {level} slot."
    try:
        info = analyze_spell_damage(description, higher_levels, spell_level, config=config)
    except (VocabularyError, OSError) as e:
        logger.error(f"Vocabulary unavailable: {e}")
        return f"❌ Vocabulary unavailable: {e}"
    formula = describe_spell_damage(info, spell_level, level, ability_modifier)
    if not formula:
        return "✨ This spell deals no dice damage."
    return f"🎲 {formula}"


@mcp.tool
def spell_cast_levels(
    spell_level: Annotated[int, Field(ge=0, le=MAX_SPELL_LEVEL, description="Spell level, 0 for a cantrip")],
    max_player_spell_level: Annotated[int, Field(ge=0, le=MAX_SPELL_LEVEL, description="Caster's highest slot level")],
    has_upgrade: Annotated[bool, Field(description="Whether the spell scales with slot level")] = True,
) -> str:
    """List the slot levels a spell can usefully be cast at."""
    levels = get_available_cast_levels(
        spell_level, max_player_spell_level, has_upgrade, ceiling=config.max_slot_level
    )
    if not levels:
        return f"❌ No slot of level {spell_level} or higher available."
    return ", ".join(str(level) for level in levels)


def main() -> None:
    """Main entry point for the spell-damage MCP server."""
    logger.info("Starting spell-damage MCP server")
    mcp.run()

if __name__ == "__main__":
    main()
