"""Static game content: rarity table, character catalog and card catalog.

Everything here is immutable.  Runtime objects (combatants, card copies)
live in :mod:`rarity_duel.sim.core`.
"""

from .cards import ABILITY_NAMES, CARD_CATALOG, CardTemplate, EffectKind, get_card_template
from .characters import (
    CHARACTER_CATALOG,
    TUTORIAL_ENEMY,
    TUTORIAL_PLAYER,
    CharacterTemplate,
    get_character_template,
)
from .rarity import (
    RARITY_DEFENSE,
    RARITY_ORDER,
    RARITY_WEIGHTS,
    Rarity,
    get_rarity_defense,
    get_rarity_weight,
    rarity_rank,
)

__all__ = [
    # rarity
    "Rarity",
    "RARITY_ORDER",
    "RARITY_WEIGHTS",
    "RARITY_DEFENSE",
    "get_rarity_weight",
    "get_rarity_defense",
    "rarity_rank",
    # cards
    "EffectKind",
    "ABILITY_NAMES",
    "CardTemplate",
    "CARD_CATALOG",
    "get_card_template",
    # characters
    "CharacterTemplate",
    "CHARACTER_CATALOG",
    "TUTORIAL_PLAYER",
    "TUTORIAL_ENEMY",
    "get_character_template",
]
