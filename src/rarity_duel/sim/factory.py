"""Character factory -- turns catalog entries into battle-ready combatants.

Usage::

    from rarity_duel.sim.factory import create_combatant

    player = create_combatant(template, rng.fork("deck:player"))
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from rarity_duel.config import GameConfig
from rarity_duel.content.cards import ABILITY_NAMES, EffectKind
from rarity_duel.content.characters import CHARACTER_CATALOG, CharacterTemplate
from rarity_duel.content.rarity import Rarity, get_rarity_defense, get_rarity_weight
from rarity_duel.errors import InvalidCharacter
from rarity_duel.sim.core.entities import Card, Combatant
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.mechanics.card_piles import random_card
from rarity_duel.sim.mechanics.selection import weighted_random_select

logger = logging.getLogger(__name__)

# Raw mappings from older catalogs use camelCase.
_FIELD_ALIASES = {"baseHP": "base_hp", "baseHp": "base_hp"}


def coerce_template(char: CharacterTemplate | Mapping[str, Any]) -> CharacterTemplate:
    """Validate *char* into a :class:`CharacterTemplate`.

    Raises :class:`InvalidCharacter` if a required field is missing or
    invalid.
    """
    if isinstance(char, CharacterTemplate):
        return char
    if not isinstance(char, Mapping):
        raise InvalidCharacter(f"Invalid character data: {char!r}")
    raw = {_FIELD_ALIASES.get(k, k): v for k, v in char.items()}
    try:
        return CharacterTemplate.model_validate(raw)
    except ValidationError as exc:
        raise InvalidCharacter(f"Invalid character data: {exc}") from exc


def build_deck(
    template: CharacterTemplate,
    rng: GameRNG,
    config: GameConfig | None = None,
) -> list[Card]:
    """Generate and shuffle a deck for *template*.

    Each card is a uniform draw from the catalog.  Rarer characters have a
    chance of a power bonus on every card, and every
    ``config.signature_interval``-th card takes on the character's
    signature effect.
    """
    config = config or GameConfig()
    bonus_chance = config.rarity_power_bonus_chance.get(template.rarity, 0.0)
    bonus = config.divine_power_bonus if template.rarity == Rarity.DIVINE else config.power_bonus

    deck: list[Card] = []
    for i in range(config.deck_size):
        card = random_card(rng)
        if bonus_chance > 0 and rng.chance(bonus_chance):
            card.power += bonus
        if (
            template.signature is not None
            and config.signature_interval > 0
            and (i + 1) % config.signature_interval == 0
        ):
            _apply_signature(card, template.signature)
        deck.append(card)

    rng.shuffle(deck)
    return deck


def _apply_signature(card: Card, effect: EffectKind) -> None:
    card.effect = effect
    card.ability = ABILITY_NAMES[effect]


def create_combatant(
    char: CharacterTemplate | Mapping[str, Any],
    rng: GameRNG,
    config: GameConfig | None = None,
) -> Combatant:
    """Build a :class:`Combatant` from a catalog entry.

    hp starts at ``base_hp``, defense comes from the rarity table, the hand
    is empty and the deck is freshly generated.
    """
    template = coerce_template(char)
    combatant = Combatant(
        name=template.name,
        rarity=template.rarity,
        defense=get_rarity_defense(template.rarity),
        base_hp=template.base_hp,
        hp=template.base_hp,
        deck=build_deck(template, rng, config),
    )
    logger.debug(
        "Created %s (%s): hp=%d defense=%d deck=%d",
        combatant.name,
        combatant.rarity.value,
        combatant.hp,
        combatant.defense,
        len(combatant.deck),
    )
    return combatant


def offer_characters(
    rng: GameRNG,
    count: int = 3,
    catalog: tuple[CharacterTemplate, ...] = CHARACTER_CATALOG,
) -> list[CharacterTemplate]:
    """Draw *count* distinct characters weighted by rarity."""
    weights = [get_rarity_weight(c.rarity) for c in catalog]
    return weighted_random_select(catalog, weights, count, rng)


def pick_opponent(
    rng: GameRNG,
    catalog: tuple[CharacterTemplate, ...] = CHARACTER_CATALOG,
) -> CharacterTemplate:
    """Draw one opponent weighted by rarity."""
    return offer_characters(rng, 1, catalog)[0]
