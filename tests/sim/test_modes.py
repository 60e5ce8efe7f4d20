"""Tests for game mode parsing, power rules and survival escalation."""

import pytest

from rarity_duel.config import GameConfig, SurvivalSettings
from rarity_duel.content.rarity import Rarity
from rarity_duel.errors import InvalidArgument
from rarity_duel.sim.core.entities import Card, Combatant
from rarity_duel.sim.modes import (
    GameMode,
    apply_mode_to_card,
    apply_survival_pressure,
    escalation_level,
    is_boss_round,
    modified_power,
    parse_mode,
)


def _make_enemy(hp: int = 20) -> Combatant:
    return Combatant(name="Rogue", rarity=Rarity.UNCOMMON, defense=1, base_hp=28, hp=hp)


# ---------------------------------------------------------------------------
# parse_mode
# ---------------------------------------------------------------------------

class TestParseMode:
    @pytest.mark.parametrize("raw, expected", [
        ("standard", GameMode.STANDARD),
        ("Blitz", GameMode.BLITZ),
        (" tactical ", GameMode.TACTICAL),
        ("survival", GameMode.SURVIVAL),
        ("rounds", GameMode.SURVIVAL),
        (GameMode.BLITZ, GameMode.BLITZ),
    ])
    def test_known_modes(self, raw, expected):
        assert parse_mode(raw) is expected

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgument):
            parse_mode("speedrun")


# ---------------------------------------------------------------------------
# Power rules
# ---------------------------------------------------------------------------

class TestModifiedPower:
    def setup_method(self):
        self.config = GameConfig()

    def test_standard_unchanged(self):
        settings = self.config.mode_settings(GameMode.STANDARD)
        assert modified_power(5, settings) == 5

    def test_blitz_doubles(self):
        settings = self.config.mode_settings(GameMode.BLITZ)
        assert modified_power(5, settings) == 10
        assert modified_power(0, settings) == 0

    @pytest.mark.parametrize("power, expected", [(10, 7), (5, 3), (2, 1), (1, 1), (0, 1)])
    def test_tactical_seventy_percent_min_one(self, power, expected):
        settings = self.config.mode_settings(GameMode.TACTICAL)
        assert modified_power(power, settings) == expected

    def test_apply_mode_logs_change(self):
        card = Card(name="Flame Warrior", power=5)
        line = apply_mode_to_card(card, self.config.mode_settings(GameMode.BLITZ))
        assert card.power == 10
        assert line == "Flame Warrior power 5 -> 10 (Blitz)"

    def test_apply_mode_silent_when_unchanged(self):
        card = Card(name="Flame Warrior", power=5)
        assert apply_mode_to_card(card, self.config.mode_settings(GameMode.STANDARD)) is None
        assert card.power == 5


# ---------------------------------------------------------------------------
# Survival
# ---------------------------------------------------------------------------

class TestSurvival:
    def setup_method(self):
        self.config = GameConfig()

    @pytest.mark.parametrize("round_number, level", [(1, 0), (3, 0), (4, 1), (6, 1), (7, 2), (10, 3)])
    def test_escalation_level(self, round_number, level):
        assert escalation_level(round_number, self.config) == level

    def test_boss_rounds(self):
        assert [r for r in range(1, 16) if is_boss_round(r, self.config)] == [5, 10, 15]

    def test_escalation_disabled(self):
        config = GameConfig(survival=SurvivalSettings(escalation_interval=0, boss_interval=0))
        assert escalation_level(9, config) == 0
        assert not is_boss_round(10, config)

    def test_early_round_no_pressure(self):
        enemy, card = _make_enemy(), Card(name="Ice Mage", power=4)
        assert apply_survival_pressure(enemy, card, 1, self.config) == []
        assert card.power == 4
        assert enemy.hp == 20

    def test_escalated_round(self):
        enemy, card = _make_enemy(), Card(name="Ice Mage", power=4)
        lines = apply_survival_pressure(enemy, card, 4, self.config)
        assert card.power == 5
        assert lines == ["The enemy grows stronger (+1 power)"]

    def test_boss_round(self):
        enemy, card = _make_enemy(hp=20), Card(name="Ice Mage", power=4)
        lines = apply_survival_pressure(enemy, card, 5, self.config)
        # level 1 -> 5 power, then x1.5 rounded up
        assert card.power == 8
        assert card.name == "Boss Ice Mage"
        assert enemy.hp == 30
        assert any(line.startswith("Boss round!") for line in lines)
