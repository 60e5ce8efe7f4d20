"""Random and greedy agents for batch simulation.

``RandomAgent`` is the baseline: it picks uniformly, like a player who does
not read the cards.  ``GreedyAgent`` plays the highest-power card and, when
the opponent's hand is visible, prefers Shock/Freeze-style cards against a
dangerous hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rarity_duel.content.cards import EffectKind
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from rarity_duel.sim.core.entities import Combatant

_DENIAL_EFFECTS = frozenset({
    EffectKind.SHOCK,
    EffectKind.FREEZE,
    EffectKind.STURDY,
    EffectKind.SHIELD,
    EffectKind.PROTECT,
})


class RandomAgent(PlayAgent):
    """Agent that plays a uniformly random card.

    Parameters
    ----------
    rng:
        Seeded RNG.  If ``None``, ``GameRNG(seed=0)`` is used.
    """

    def __init__(self, rng: GameRNG | None = None) -> None:
        self._rng = rng or GameRNG(seed=0)

    def choose_card(
        self,
        player: Combatant,
        enemy: Combatant,
        enemy_hand_visible: bool,
    ) -> int:
        return self._rng.random_index(len(player.hand))


class GreedyAgent(PlayAgent):
    """Agent that plays its strongest card.

    If the opponent's hand is visible and its best card out-powers the
    player's defense by ``danger_margin`` or more, a card with a denial
    effect is preferred.
    """

    def __init__(self, rng: GameRNG | None = None, danger_margin: int = 4) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._danger_margin = danger_margin

    def choose_card(
        self,
        player: Combatant,
        enemy: Combatant,
        enemy_hand_visible: bool,
    ) -> int:
        hand = player.hand
        if enemy_hand_visible and enemy.hand:
            threat = max(c.power for c in enemy.hand) - player.defense
            if threat >= self._danger_margin:
                denial = [i for i, c in enumerate(hand) if c.effect in _DENIAL_EFFECTS]
                if denial:
                    return max(denial, key=lambda i: hand[i].power)

        best = max(c.power for c in hand)
        candidates = [i for i, c in enumerate(hand) if c.power == best]
        return self._rng.random_choice(candidates)
