"""Base class for agents that play the human side of a duel.

The headless simulator asks an agent which card to play each round.  The
opponent never uses an agent: its card is always a uniform random pick made
by the round resolver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rarity_duel.sim.core.entities import Combatant


class PlayAgent(ABC):
    """Base class for card-picking agents."""

    @abstractmethod
    def choose_card(
        self,
        player: Combatant,
        enemy: Combatant,
        enemy_hand_visible: bool,
    ) -> int:
        """Return the index of the card to play from ``player.hand``.

        Parameters
        ----------
        player:
            The agent's combatant (full observability of its own hand).
        enemy:
            The opponent.  Agents may only look at ``enemy.hand`` when
            *enemy_hand_visible* is True.
        enemy_hand_visible:
            Whether a reveal effect is currently exposing the opponent's
            hand.
        """
