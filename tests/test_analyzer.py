"""
Tests for analyze_spell_damage().

Covers:
- Base damage, attack roll and modifier detection on full descriptions
- Routing: cantrips to character-level scaling, leveled spells to slot scaling
- Anchoring of typeless increments to the base damage type
- Mutual exclusivity of the scaling fields
"""

import pytest

from spell_damage import (
    Ability,
    AnalyzerConfig,
    DamageComponent,
    DamageType,
    UpgradeType,
    analyze_spell_damage,
    anchor_increments,
)

from spell_texts import (
    FIRE_BOLT_DESCRIPTION,
    FIRE_BOLT_HIGHER,
    FIREBALL_DESCRIPTION,
    FIREBALL_HIGHER,
    SIMPLE_DESCRIPTION,
    SIMPLE_HIGHER,
)


class TestBaseAnalysis:
    """Extraction and detectors run on the description."""

    def test_simple_leveled_spell(self) -> None:
        info = analyze_spell_damage(SIMPLE_DESCRIPTION, None, 3)
        assert info.is_damage_spell is True
        assert info.base_damage == (DamageComponent(dice_count=2, dice_type=6, damage_type=DamageType.FIRE),)
        assert info.base_damage[0].formula == "2d6"
        assert info.upgrade_type == UpgradeType.NONE
        assert info.upgrade_pattern is None
        assert info.upgrade_per_levels is None
        assert info.character_level_thresholds is None

    def test_attack_roll(self, fire_bolt) -> None:
        assert fire_bolt.is_attack_roll is True

    def test_saving_throw_spell(self, fireball) -> None:
        assert fireball.is_attack_roll is False
        assert [c.label() for c in fireball.base_damage] == ["8d6 feu"]

    def test_modifier(self) -> None:
        info = analyze_spell_damage("La cible subit 1d8 dégâts de force + CHA.", None, 1)
        assert info.has_modifier is True
        assert info.modifier_ability == Ability.CHARISMA
        assert [c.label() for c in info.base_damage] == ["1d8 force"]

    def test_no_damage(self) -> None:
        info = analyze_spell_damage("Vous devenez invisible pendant une heure.", None, 2)
        assert info.is_damage_spell is False
        assert info.base_damage == ()
        assert info.has_modifier is False

    def test_empty_description(self) -> None:
        info = analyze_spell_damage("", "", 0)
        assert info.is_damage_spell is False
        assert info.upgrade_type == UpgradeType.NONE

    def test_context_filter_follows_config(self) -> None:
        text = "Vous créez 3d4 lueurs dansantes."
        assert analyze_spell_damage(text, None, 1).is_damage_spell is False
        relaxed = AnalyzerConfig(require_damage_context=False)
        assert analyze_spell_damage(text, None, 1, config=relaxed).is_damage_spell is True


class TestScalingRouting:
    """Exactly one scaling parser runs."""

    def test_slot_scaling(self, simple_slot_spell) -> None:
        assert simple_slot_spell.upgrade_type == UpgradeType.PER_SLOT_LEVEL
        assert simple_slot_spell.upgrade_per_levels == 1
        assert simple_slot_spell.character_level_thresholds is None
        assert [c.label() for c in simple_slot_spell.upgrade_pattern] == ["1d6 feu"]

    def test_cantrip_scaling(self, fire_bolt) -> None:
        assert fire_bolt.upgrade_type == UpgradeType.CHARACTER_LEVEL
        assert fire_bolt.character_level_thresholds == (5, 11, 17)
        assert fire_bolt.upgrade_per_levels is None
        assert [c.label() for c in fire_bolt.upgrade_pattern] == ["1d10 feu"]

    def test_cantrip_never_gets_slot_scaling(self) -> None:
        info = analyze_spell_damage(SIMPLE_DESCRIPTION, SIMPLE_HIGHER, 0)
        assert info.upgrade_type == UpgradeType.NONE

    def test_leveled_spell_never_gets_character_scaling(self) -> None:
        info = analyze_spell_damage(FIRE_BOLT_DESCRIPTION, FIRE_BOLT_HIGHER, 2)
        assert info.upgrade_type == UpgradeType.NONE

    def test_unparsed_scaling_text(self) -> None:
        info = analyze_spell_damage(FIREBALL_DESCRIPTION, "La zone d'effet s'agrandit.", 3)
        assert info.upgrade_type == UpgradeType.NONE
        assert info.upgrade_pattern is None

    @pytest.mark.parametrize("description,higher,level", [
        (SIMPLE_DESCRIPTION, SIMPLE_HIGHER, 3),
        (FIREBALL_DESCRIPTION, FIREBALL_HIGHER, 3),
        (FIRE_BOLT_DESCRIPTION, FIRE_BOLT_HIGHER, 0),
        (SIMPLE_DESCRIPTION, None, 1),
    ])
    def test_mutual_exclusivity(self, description, higher, level) -> None:
        info = analyze_spell_damage(description, higher, level)
        if info.upgrade_type == UpgradeType.PER_SLOT_LEVEL:
            assert info.character_level_thresholds is None
        if info.upgrade_type == UpgradeType.CHARACTER_LEVEL:
            assert info.upgrade_per_levels is None

    def test_idempotent(self) -> None:
        assert analyze_spell_damage(FIREBALL_DESCRIPTION, FIREBALL_HIGHER, 3) == \
            analyze_spell_damage(FIREBALL_DESCRIPTION, FIREBALL_HIGHER, 3)


class TestAnchorIncrements:
    """Typeless increments adopt the base damage type."""

    def test_single_matching_type(self) -> None:
        base = [DamageComponent(dice_count=2, dice_type=6, damage_type=DamageType.FIRE)]
        anchored = anchor_increments([DamageComponent(dice_count=1, dice_type=6)], base)
        assert anchored[0].damage_type == DamageType.FIRE

    def test_ambiguous_types_left_typeless(self) -> None:
        base = [
            DamageComponent(dice_count=2, dice_type=6, damage_type=DamageType.FIRE),
            DamageComponent(dice_count=2, dice_type=6, damage_type=DamageType.COLD),
        ]
        anchored = anchor_increments([DamageComponent(dice_count=1, dice_type=6)], base)
        assert anchored[0].damage_type is None

    def test_different_die_left_typeless(self) -> None:
        base = [DamageComponent(dice_count=2, dice_type=8, damage_type=DamageType.FIRE)]
        anchored = anchor_increments([DamageComponent(dice_count=1, dice_type=6)], base)
        assert anchored[0].damage_type is None

    def test_typed_increment_kept(self) -> None:
        base = [DamageComponent(dice_count=2, dice_type=6, damage_type=DamageType.FIRE)]
        increment = DamageComponent(dice_count=1, dice_type=6, damage_type=DamageType.RADIANT)
        assert anchor_increments([increment], base) == (increment,)

    def test_typeless_base_blocks_anchoring(self) -> None:
        base = [
            DamageComponent(dice_count=2, dice_type=6, damage_type=DamageType.FIRE),
            DamageComponent(dice_count=1, dice_type=6),
        ]
        anchored = anchor_increments([DamageComponent(dice_count=1, dice_type=6)], base)
        assert anchored[0].damage_type is None
