"""
Tests for dice-damage extraction.

Covers:
- extract_damage_components(): dice tokens, adjacent damage-type words,
  "dégâts de X" lookahead, per-token typing, degenerate dice
- The damage-context filter used for spell descriptions
- mentions_damage() keyword detection
"""

import pytest

from spell_damage import AnalyzerConfig, DamageType, extract_damage_components, mentions_damage


def _terms(components) -> list[tuple[str, DamageType | None]]:
    return [(c.formula, c.damage_type) for c in components]


class TestExtractDamageComponents:
    """Dice tokens and their damage types."""

    def test_simple_damage(self) -> None:
        components = extract_damage_components("Vous infligez 2d6 dégâts de feu.")
        assert len(components) == 1
        assert components[0].dice_count == 2
        assert components[0].dice_type == 6
        assert components[0].formula == "2d6"
        assert components[0].damage_type == DamageType.FIRE

    @pytest.mark.parametrize("text,expected", [
        ("2d8 de feu", DamageType.FIRE),
        ("2d8 feu", DamageType.FIRE),
        ("1d8 dégâts nécrotiques", DamageType.NECROTIC),
        ("4d4 dégâts d'acide", DamageType.ACID),
        ("3d8 dégâts de Tonnerre", DamageType.THUNDER),
        ("1d6 de dégâts de froid", DamageType.COLD),
    ])
    def test_type_phrasings(self, text: str, expected: DamageType) -> None:
        assert _terms(extract_damage_components(text))[0][1] == expected

    def test_multiple_components_in_order(self) -> None:
        text = "La cible subit 2d8 dégâts de feu et 1d6 dégâts radiants."
        assert _terms(extract_damage_components(text)) == [
            ("2d8", DamageType.FIRE),
            ("1d6", DamageType.RADIANT),
        ]

    def test_type_not_inherited(self) -> None:
        text = "La cible subit 2d8 dégâts de feu, puis 1d4 à chaque tour."
        assert _terms(extract_damage_components(text)) == [
            ("2d8", DamageType.FIRE),
            ("1d4", None),
        ]

    def test_unknown_type_word(self) -> None:
        components = extract_damage_components("1d6 dégâts supplémentaires")
        assert components[0].damage_type is None

    def test_bare_token(self) -> None:
        assert _terms(extract_damage_components("1d10")) == [("1d10", None)]

    def test_uppercase(self) -> None:
        assert _terms(extract_damage_components("2D6 dégâts de FEU")) == [("2d6", DamageType.FIRE)]

    def test_multi_digit_counts(self) -> None:
        assert _terms(extract_damage_components("12d6 dégâts de force")) == [("12d6", DamageType.FORCE)]

    @pytest.mark.parametrize("text", [
        "",
        None,
        "La cible doit réussir un jet de sauvegarde DD 15.",
        "Vous regagnez 10 points de vie.",
    ])
    def test_no_dice(self, text) -> None:
        assert extract_damage_components(text) == []

    @pytest.mark.parametrize("text", ["0d6 dégâts", "1d1 dégâts", "1d0 dégâts"])
    def test_degenerate_dice_ignored(self, text: str) -> None:
        assert extract_damage_components(text) == []

    def test_idempotent(self) -> None:
        text = "La cible subit 2d8 dégâts de feu et 1d6 dégâts radiants."
        assert extract_damage_components(text) == extract_damage_components(text)

    def test_formula_consistency(self) -> None:
        for component in extract_damage_components("3d4 feu, 2d12 froid et 10d10 poison"):
            assert component.formula == f"{component.dice_count}d{component.dice_type}"


class TestDamageContext:
    """The context filter applied to descriptions."""

    def test_roll_bonus_excluded(self) -> None:
        text = "Le résultat de 1d4 est à ajouter au prochain jet d'attaque."
        assert extract_damage_components(text, require_context=True) == []

    def test_no_damage_words_excluded(self) -> None:
        text = "Vous créez 3d4 lueurs dansantes."
        assert extract_damage_components(text, require_context=True) == []
        assert len(extract_damage_components(text)) == 1

    def test_saving_throw_is_not_a_roll_bonus(self) -> None:
        text = (
            "La cible doit réussir un jet de sauvegarde de Dextérité "
            "ou subir 8d6 dégâts de feu."
        )
        assert _terms(extract_damage_components(text, require_context=True)) == [("8d6", DamageType.FIRE)]

    def test_saving_throw_cut_by_window_edge(self) -> None:
        text = "Chaque créature subit 3d8 dégâts de tonnerre en cas de jet de sauvegarde raté."
        assert _terms(extract_damage_components(text, require_context=True)) == [("3d8", DamageType.THUNDER)]

    def test_ability_check_roll_excluded(self) -> None:
        text = "La cible perd 1d4 sur son jet de caractéristique."
        assert extract_damage_components(text, require_context=True) == []

    def test_window_size_from_config(self) -> None:
        text = "La cible subit des blessures, soit exactement 2d6."
        narrow = AnalyzerConfig(context_before=10, context_after=0)
        assert extract_damage_components(text, require_context=True, config=narrow) == []
        assert len(extract_damage_components(text, require_context=True)) == 1


class TestMentionsDamage:
    """Loose damage keyword detection."""

    @pytest.mark.parametrize("text", [
        "La cible subit 2d6 dégâts.",
        "Le sort inflige une blessure.",
        "La créature perd 10 points de vie.",
        "2d4",
    ])
    def test_mentions(self, text: str) -> None:
        assert mentions_damage(text) is True

    @pytest.mark.parametrize("text", ["Vous devenez invisible.", "", None])
    def test_no_mention(self, text) -> None:
        assert mentions_damage(text) is False
