"""Core runtime primitives for the duel engine."""

from rarity_duel.sim.core.entities import Card, Combatant
from rarity_duel.sim.core.game_state import BattleLog, GamePhase, GameState
from rarity_duel.sim.core.rng import GameRNG

__all__ = [
    # rng
    "GameRNG",
    # entities
    "Card",
    "Combatant",
    # game_state
    "BattleLog",
    "GamePhase",
    "GameState",
]
