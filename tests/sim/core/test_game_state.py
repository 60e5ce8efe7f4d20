"""Tests for the battle log and game state models."""

from rarity_duel.content.rarity import Rarity
from rarity_duel.sim.core.entities import Combatant
from rarity_duel.sim.core.game_state import BattleLog, GamePhase, GameState
from rarity_duel.sim.modes import GameMode


def _make_combatant(name: str = "Squire") -> Combatant:
    return Combatant(name=name, rarity=Rarity.COMMON, defense=0, base_hp=30, hp=30)


class TestBattleLog:
    def test_append_preserves_order(self):
        log = BattleLog()
        log.append("one")
        log.extend(["two", "three"])
        assert list(log) == ["one", "two", "three"]
        assert len(log) == 3
        assert log[-1] == "three"

    def test_contains_fragment(self):
        log = BattleLog(entries=["You played: Ice Mage (Freeze)"])
        assert log.contains("Ice Mage")
        assert not log.contains("Burn")


class TestGameState:
    def test_defaults(self):
        state = GameState()
        assert state.phase is GamePhase.TITLE
        assert state.mode is GameMode.STANDARD
        assert state.player is None
        assert len(state.logs) == 0
        assert not state.in_battle

    def test_in_battle_needs_both_combatants(self):
        state = GameState(phase=GamePhase.BATTLE, player=_make_combatant())
        assert not state.in_battle
        state = state.model_copy(update={"enemy": _make_combatant("Rogue")})
        assert state.in_battle

    def test_tutorial_counts_as_battle(self):
        state = GameState(
            phase=GamePhase.TUTORIAL,
            player=_make_combatant(),
            enemy=_make_combatant("Training Dummy"),
        )
        assert state.in_battle

    def test_result_phase_is_not_battle(self):
        state = GameState(
            phase=GamePhase.RESULT,
            player=_make_combatant(),
            enemy=_make_combatant("Rogue"),
        )
        assert not state.in_battle
