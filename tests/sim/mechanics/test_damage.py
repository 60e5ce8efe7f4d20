"""Tests for damage calculation and application."""

import pytest

from rarity_duel.content.rarity import Rarity
from rarity_duel.sim.core.entities import Combatant
from rarity_duel.sim.mechanics.damage import calculate_damage, deal_card_damage


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_combatant(**kwargs) -> Combatant:
    defaults = dict(name="Mage", rarity=Rarity.RARE, defense=2, base_hp=30, hp=30)
    defaults.update(kwargs)
    return Combatant(**defaults)


# ---------------------------------------------------------------------------
# calculate_damage
# ---------------------------------------------------------------------------

class TestCalculateDamage:
    @pytest.mark.parametrize(
        "power, defense, expected",
        [(5, 2, 3), (2, 2, 0), (1, 7, 0), (10, 0, 10), (0, 0, 0), (-3, 0, 0)],
    )
    def test_power_minus_defense_floored(self, power, defense, expected):
        assert calculate_damage(power, defense) == expected

    def test_shield_blocks_everything(self):
        assert calculate_damage(50, 0, shielded=True) == 0


# ---------------------------------------------------------------------------
# deal_card_damage
# ---------------------------------------------------------------------------

class TestDealCardDamage:
    def test_defense_reduces_damage(self):
        target = _make_combatant()
        report = deal_card_damage(target, 5, "You")
        assert target.hp == 27
        assert report.hp_lost == 3
        assert not report.shielded
        assert report.message == "You took 3 damage (reduced by 2 defense)"

    def test_weak_card_does_nothing(self):
        target = _make_combatant(defense=7, rarity=Rarity.MYTHIC)
        report = deal_card_damage(target, 4, "Enemy")
        assert target.hp == 30
        assert report.message == "Enemy took 0 damage (reduced by 7 defense)"

    def test_player_shield_message(self):
        target = _make_combatant(shield=True)
        report = deal_card_damage(target, 99, "You")
        assert target.hp == 30
        assert report.shielded
        assert report.message == "You were shielded and took no damage"

    def test_enemy_shield_message(self):
        target = _make_combatant(shield=True)
        report = deal_card_damage(target, 99, "Enemy")
        assert report.message == "Enemy was shielded and took no damage"

    def test_damage_can_drop_hp_below_zero(self):
        target = _make_combatant(hp=2, defense=0)
        deal_card_damage(target, 6, "Enemy")
        assert target.hp == -4
        assert target.is_defeated
