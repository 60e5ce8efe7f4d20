"""Rarity tiers -- the single table that drives both how often a character
is offered and how much damage it shrugs off."""

from __future__ import annotations

from enum import Enum


class Rarity(str, Enum):
    """Character rarity, ordered from most to least common."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"
    MYTHIC = "Mythic"
    DIVINE = "Divine"


RARITY_ORDER: tuple[Rarity, ...] = tuple(Rarity)

# Tuned for roughly a 0.1% chance of a Divine character per draw.
RARITY_WEIGHTS: dict[Rarity, int] = {
    Rarity.COMMON: 1000,
    Rarity.UNCOMMON: 500,
    Rarity.RARE: 250,
    Rarity.EPIC: 100,
    Rarity.LEGENDARY: 50,
    Rarity.MYTHIC: 10,
    Rarity.DIVINE: 1,
}

RARITY_DEFENSE: dict[Rarity, int] = {
    Rarity.COMMON: 0,
    Rarity.UNCOMMON: 1,
    Rarity.RARE: 2,
    Rarity.EPIC: 3,
    Rarity.LEGENDARY: 5,
    Rarity.MYTHIC: 7,
    Rarity.DIVINE: 10,
}


def get_rarity_weight(rarity: Rarity | str) -> int:
    """Return the selection weight for *rarity*."""
    return RARITY_WEIGHTS[Rarity(rarity)]


def get_rarity_defense(rarity: Rarity | str) -> int:
    """Return the flat damage reduction granted by *rarity*."""
    return RARITY_DEFENSE[Rarity(rarity)]


def rarity_rank(rarity: Rarity | str) -> int:
    """Position of *rarity* in :data:`RARITY_ORDER` (0 = Common)."""
    return RARITY_ORDER.index(Rarity(rarity))
