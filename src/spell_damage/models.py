"""
Data models for the spell-damage analyzer.

All models are frozen: a parsed spell is built once by the analyzer and read
by the compilers, which fold increments into fresh components instead of
mutating the ones they were given.
"""

from pydantic import BaseModel, Field, computed_field, model_validator

from .vocabulary import Ability, DamageType, UpgradeType


class DamageComponent(BaseModel):
    """One dice-damage term, e.g. ``2d8 feu``."""
    model_config = {"frozen": True}

    dice_count: int = Field(..., ge=1, description="Number of dice")
    dice_type: int = Field(..., ge=2, description="Die size (4, 6, 8, 10, 12, 20...)")
    damage_type: DamageType | None = Field(default=None, description="Damage type, if named next to the dice")

    @computed_field
    @property
    def formula(self) -> str:
        """Canonical dice notation, always derived from the counts."""
        return f"{self.dice_count}d{self.dice_type}"

    @property
    def merge_key(self) -> tuple[int, DamageType | None]:
        """Components sharing this key are the same term and add up."""
        return (self.dice_type, self.damage_type)

    def label(self) -> str:
        """Display form: the formula, suffixed with the damage type when known."""
        if self.damage_type is not None:
            return f"{self.formula} {self.damage_type.value}"
        return self.formula

    def scaled(self, factor: int) -> "DamageComponent":
        """Return a copy with ``factor`` times as many dice."""
        return self.model_copy(update={"dice_count": self.dice_count * factor})


class ModifierInfo(BaseModel):
    """Result of ability-modifier detection."""
    model_config = {"frozen": True}

    has_modifier: bool = False
    ability: Ability | None = None


class SlotUpgrade(BaseModel):
    """Damage increment gained per spell slot level above the base level."""
    model_config = {"frozen": True}

    components: tuple[DamageComponent, ...]
    per_levels: int = Field(default=1, ge=1)


class CantripUpgrade(BaseModel):
    """Damage increment gained at each character-level threshold."""
    model_config = {"frozen": True}

    components: tuple[DamageComponent, ...]
    thresholds: tuple[int, ...]


class SpellDamageInfo(BaseModel):
    """Full parsed model of a spell's damage behavior.

    Exactly one of ``upgrade_per_levels`` (per_slot_level) and
    ``character_level_thresholds`` (character_level) is set, matching
    ``upgrade_type``; both are unset when the spell does not scale.
    """
    model_config = {"frozen": True}

    is_damage_spell: bool = False
    is_attack_roll: bool = False
    base_damage: tuple[DamageComponent, ...] = ()
    has_modifier: bool = False
    modifier_ability: Ability | None = None

    upgrade_type: UpgradeType = UpgradeType.NONE
    upgrade_pattern: tuple[DamageComponent, ...] | None = None
    upgrade_per_levels: int | None = Field(default=None, ge=1)
    character_level_thresholds: tuple[int, ...] | None = None

    @model_validator(mode="after")
    def _check_upgrade_fields(self) -> "SpellDamageInfo":
        if self.is_damage_spell != bool(self.base_damage):
            raise ValueError("is_damage_spell must be true exactly when base_damage is non-empty")

        if self.upgrade_type == UpgradeType.NONE:
            if self.upgrade_pattern is not None:
                raise ValueError("upgrade_pattern must be None when upgrade_type is 'none'")
            if self.upgrade_per_levels is not None or self.character_level_thresholds is not None:
                raise ValueError("a spell without scaling has no scaling parameters")
            return self

        if not self.upgrade_pattern:
            raise ValueError(f"upgrade_type {self.upgrade_type.value!r} requires an upgrade_pattern")

        if self.upgrade_type == UpgradeType.PER_SLOT_LEVEL:
            if self.upgrade_per_levels is None or self.character_level_thresholds is not None:
                raise ValueError("per_slot_level scaling sets upgrade_per_levels only")
        else:
            if not self.character_level_thresholds or self.upgrade_per_levels is not None:
                raise ValueError("character_level scaling sets character_level_thresholds only")
            if list(self.character_level_thresholds) != sorted(self.character_level_thresholds):
                raise ValueError("character_level_thresholds must be ascending")
        return self

    @property
    def has_upgrade(self) -> bool:
        return self.upgrade_type != UpgradeType.NONE


__all__ = [
    "DamageComponent",
    "ModifierInfo",
    "SlotUpgrade",
    "CantripUpgrade",
    "SpellDamageInfo",
]
