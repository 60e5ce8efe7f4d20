"""Runtime models for a duel: card copies and combatants.

All data classes use Pydantic v2 BaseModel.  Copies are always explicit
(``copy()``); the round resolver works on copies and hands the new values
back to the game store, which replaces its state wholesale.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from rarity_duel.content.cards import CardTemplate, EffectKind
from rarity_duel.content.rarity import Rarity


# ---------------------------------------------------------------------------
# Card
# ---------------------------------------------------------------------------

class Card(BaseModel):
    """A single physical card in a deck, hand or discard pile.

    ``power`` is mutable: effects such as Freeze or Chaos change the power
    of the copy being played in the current round.
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    emoji: str = ""
    power: int
    ability: str = "None"
    effect: EffectKind | None = None

    @classmethod
    def from_template(cls, template: CardTemplate) -> Card:
        return cls(
            name=template.name,
            emoji=template.emoji,
            power=template.power,
            ability=template.ability,
            effect=template.effect,
        )

    def copy(self) -> Card:  # type: ignore[override]
        """Return an independent value copy (same ``id``)."""
        return self.model_copy()


# ---------------------------------------------------------------------------
# Combatant
# ---------------------------------------------------------------------------

class Combatant(BaseModel):
    """A character instance taking part in one battle.

    ``hp`` may drop to zero or below; that signals defeat and ends the
    battle.  ``defense`` and ``rarity`` are fixed when the combatant is
    created.
    """

    name: str = Field(frozen=True)
    rarity: Rarity = Field(frozen=True)
    defense: int = Field(frozen=True, ge=0)
    base_hp: int = Field(frozen=True, gt=0)
    hp: int
    shield: bool = False
    """Transient: set by Shield/Protect, cleared at the end of every round."""

    hand: list[Card] = Field(default_factory=list)
    deck: list[Card] = Field(default_factory=list)
    """Draw pile; the top card is ``deck[0]``."""

    discard_pile: list[Card] = Field(default_factory=list)

    # -- queries -------------------------------------------------------------

    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    # -- hp ------------------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Subtract *amount* (floored at 0) from hp and return the hp lost."""
        lost = max(0, amount)
        self.hp -= lost
        return lost

    def heal(self, amount: int) -> None:
        if amount > 0:
            self.hp += amount

    # -- copies --------------------------------------------------------------

    def copy(self) -> Combatant:  # type: ignore[override]
        """Return a deep value copy, including every pile."""
        return self.model_copy(deep=True)
