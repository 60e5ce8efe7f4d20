"""Deck, hand and discard-pile management for a combatant.

The economy is closed: played cards go to the discard pile, the discard
pile is reshuffled into the deck when the deck runs dry, and only when both
are empty is a fresh card synthesised from the catalog.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rarity_duel.content.cards import CARD_CATALOG
from rarity_duel.errors import InvalidCardIndex
from rarity_duel.sim.core.entities import Card

if TYPE_CHECKING:
    from rarity_duel.sim.core.entities import Combatant
    from rarity_duel.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)


def random_card(rng: GameRNG) -> Card:
    """Return a fresh copy of a uniformly chosen catalog card."""
    return Card.from_template(rng.random_choice(CARD_CATALOG))


def draw_card(combatant: Combatant, rng: GameRNG) -> Card:
    """Remove and return the top card of *combatant*'s deck.

    Reshuffles the discard pile into the deck first if the deck is empty.
    If both piles are empty a new random card is synthesised; this never
    raises and never returns ``None``.
    """
    if not combatant.deck and combatant.discard_pile:
        _reshuffle_discard_into_deck(combatant, rng)
    if combatant.deck:
        return combatant.deck.pop(0)

    logger.warning(
        "%s has no cards in deck or discard; synthesising a fallback card",
        combatant.name,
    )
    return random_card(rng)


def refill_hand(combatant: Combatant, target_size: int, rng: GameRNG) -> list[Card]:
    """Draw until the hand holds *target_size* cards.  Returns the cards drawn."""
    drawn: list[Card] = []
    while len(combatant.hand) < target_size:
        card = draw_card(combatant, rng)
        combatant.hand.append(card)
        drawn.append(card)
    return drawn


def discard_from_hand(combatant: Combatant, index: int) -> Card:
    """Move the card at *index* from the hand to the discard pile."""
    if not 0 <= index < len(combatant.hand):
        raise InvalidCardIndex(index, len(combatant.hand))
    card = combatant.hand.pop(index)
    combatant.discard_pile.append(card)
    return card


def discard_hand(combatant: Combatant) -> None:
    """Move every card in the hand to the discard pile."""
    combatant.discard_pile.extend(combatant.hand)
    combatant.hand.clear()


def _reshuffle_discard_into_deck(combatant: Combatant, rng: GameRNG) -> None:
    logger.debug(
        "Reshuffling %d discarded card(s) into %s's deck",
        len(combatant.discard_pile),
        combatant.name,
    )
    combatant.deck.extend(combatant.discard_pile)
    combatant.discard_pile.clear()
    rng.shuffle(combatant.deck)
