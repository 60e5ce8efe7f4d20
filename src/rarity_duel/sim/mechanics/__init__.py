"""Core duel mechanics.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from rarity_duel.sim.mechanics import (
        weighted_random_select,
        draw_card, refill_hand, discard_from_hand, discard_hand, random_card,
        calculate_damage, deal_card_damage,
    )
"""

# -- weighted selection ------------------------------------------------------
from .selection import weighted_random_select

# -- card piles --------------------------------------------------------------
from .card_piles import (
    discard_from_hand,
    discard_hand,
    draw_card,
    random_card,
    refill_hand,
)

# -- damage ------------------------------------------------------------------
from .damage import DamageReport, calculate_damage, deal_card_damage

__all__ = [
    # selection
    "weighted_random_select",
    # card piles
    "draw_card",
    "refill_hand",
    "discard_from_hand",
    "discard_hand",
    "random_card",
    # damage
    "calculate_damage",
    "deal_card_damage",
    "DamageReport",
]
