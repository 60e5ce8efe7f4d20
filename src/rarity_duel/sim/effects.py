"""Ability effect registry -- the single source of truth for what each card
ability does.

Every :class:`EffectKind` maps to exactly one handler with the signature::

    handler(acting_card, opposing_card, actor, opponent, reveal, rng) -> str

A handler mutates only the fields listed in its docstring and returns the
line to append to the battle log.  Handlers hold no timing logic: the
reveal effects just call ``reveal`` and leave the rest to the caller.

Usage::

    from rarity_duel.sim.effects import apply_effect

    message = apply_effect(card.effect, card, other_card, me, them, reveal, rng)
"""

from __future__ import annotations

import logging
from typing import Callable

from rarity_duel.content.cards import EffectKind
from rarity_duel.sim.core.entities import Card, Combatant
from rarity_duel.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)

RevealCallback = Callable[[], None]
EffectHandler = Callable[
    [Card, Card, Combatant, Combatant, RevealCallback, GameRNG], str
]


def no_reveal() -> None:
    """Reveal callback for sides whose reveals are not shown to the player."""


# ---------------------------------------------------------------------------
# Direct damage
# ---------------------------------------------------------------------------

def _burn(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opponent.hp -= 2"""
    opponent.hp -= 2
    return "🔥 Burn effect deals 2 damage!"


def _poison(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opponent.hp -= 3"""
    opponent.hp -= 3
    return "🧪 Poison deals 3 damage over time!"


def _dice_roll(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opponent.hp -= 3 / 1 / 5 for a d6 roll of 1-2 / 3-4 / 5-6."""
    roll = rng.random_int(1, 6)
    if roll <= 2:
        damage = 3
    elif roll <= 4:
        damage = 1
    else:
        damage = 5
    opponent.hp -= damage
    return f"🎲 Dice Roll landed on {roll} and dealt {damage} damage!"


def _summon(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opponent.hp -= 1..4"""
    summon_power = rng.random_int(1, 4)
    opponent.hp -= summon_power
    return f"🐾 Summon calls a creature that deals {summon_power} damage!"


# ---------------------------------------------------------------------------
# Power modification
# ---------------------------------------------------------------------------

def _freeze(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opposing.power -= 2, floored at 0"""
    opposing.power = max(0, opposing.power - 2)
    return "❄️ Freeze effect reduces enemy card power by 2!"


def _sturdy(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opposing.power -= 2, floored at 0"""
    opposing.power = max(0, opposing.power - 2)
    return "🗿 Sturdy reduces enemy card power by 2!"


def _gust(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opposing.power -= 1 (no floor; damage is floored later)"""
    opposing.power -= 1
    return "🌪️ Gust reduces enemy card power by 1!"


def _shock(acting, opposing, actor, opponent, reveal, rng) -> str:
    """opposing.power = 0"""
    opposing.power = 0
    return "⚡ Shock completely nullifies the enemy card's power!"


def _steal(acting, opposing, actor, opponent, reveal, rng) -> str:
    """acting.power = opposing.power"""
    acting.power = opposing.power
    return "🕵️ Steal copies the enemy card's power!"


def _chaos(acting, opposing, actor, opponent, reveal, rng) -> str:
    """acting.power <-> opposing.power"""
    acting.power, opposing.power = opposing.power, acting.power
    return "🌀 Chaos swaps the power of both cards!"


# ---------------------------------------------------------------------------
# Self protection / healing
# ---------------------------------------------------------------------------

def _shield(acting, opposing, actor, opponent, reveal, rng) -> str:
    """actor.shield = True"""
    actor.shield = True
    return "🛡️ Shield protects from damage this turn!"


def _protect(acting, opposing, actor, opponent, reveal, rng) -> str:
    """actor.shield = True"""
    actor.shield = True
    return "🛡️ Protect creates a shield against damage!"


def _heal(acting, opposing, actor, opponent, reveal, rng) -> str:
    """actor.hp += 3"""
    actor.heal(3)
    return "💧 Heal restores 3 health points!"


# ---------------------------------------------------------------------------
# Information
# ---------------------------------------------------------------------------

def _reveal_hand(acting, opposing, actor, opponent, reveal, rng) -> str:
    reveal()
    return "👁️ Reveal Hand exposes enemy cards!"


def _foresight(acting, opposing, actor, opponent, reveal, rng) -> str:
    reveal()
    return "🔮 Foresight reveals the enemy's hand!"


# ---------------------------------------------------------------------------
# Compound
# ---------------------------------------------------------------------------

def _spellcast(acting, opposing, actor, opponent, reveal, rng) -> str:
    """One of three spells, chosen uniformly.

    Fireball: opponent.hp -= 3.  Frost: opposing.power -= 2 (floor 0).
    Lightning: opponent.hp -= 2 and opposing.power = 0.
    """
    spell = rng.random_int(0, 2)
    if spell == 0:
        opponent.hp -= 3
        return "🔮 Spellcast: Fireball deals 3 damage!"
    if spell == 1:
        opposing.power = max(0, opposing.power - 2)
        return "🔮 Spellcast: Frost reduces enemy card power by 2!"
    opponent.hp -= 2
    opposing.power = 0
    return "🔮 Spellcast: Lightning deals 2 damage and negates enemy card power!"


# ------------------------------------------------------------------
# Dispatch table -- maps EffectKind -> handler
# ------------------------------------------------------------------

_DISPATCH: dict[EffectKind, EffectHandler] = {
    EffectKind.BURN: _burn,
    EffectKind.FREEZE: _freeze,
    EffectKind.STEAL: _steal,
    EffectKind.SHIELD: _shield,
    EffectKind.REVEAL_HAND: _reveal_hand,
    EffectKind.DICE_ROLL: _dice_roll,
    EffectKind.SHOCK: _shock,
    EffectKind.STURDY: _sturdy,
    EffectKind.GUST: _gust,
    EffectKind.HEAL: _heal,
    EffectKind.POISON: _poison,
    EffectKind.PROTECT: _protect,
    EffectKind.SPELLCAST: _spellcast,
    EffectKind.SUMMON: _summon,
    EffectKind.FORESIGHT: _foresight,
    EffectKind.CHAOS: _chaos,
}

_missing = set(EffectKind) - set(_DISPATCH)
if _missing:
    raise RuntimeError(f"Effect kinds without a handler: {sorted(k.value for k in _missing)}")
del _missing


def registered_effects() -> list[EffectKind]:
    """Every effect kind, in declaration order."""
    return list(_DISPATCH)


def lookup_effect(effect_id: EffectKind | str | None) -> EffectHandler | None:
    """Return the handler for *effect_id*, or ``None`` if it is unknown.

    Accepts an :class:`EffectKind`, its value (``"RevealHand"``) or its
    member name (``"REVEAL_HAND"``).  Has no side effects.
    """
    if effect_id is None:
        return None
    if isinstance(effect_id, EffectKind):
        return _DISPATCH.get(effect_id)
    try:
        kind = EffectKind(effect_id)
    except ValueError:
        kind = EffectKind.__members__.get(str(effect_id))
    return _DISPATCH.get(kind) if kind is not None else None


def apply_effect(
    effect_id: EffectKind | str | None,
    acting_card: Card,
    opposing_card: Card,
    actor: Combatant,
    opponent: Combatant,
    reveal: RevealCallback = no_reveal,
    rng: GameRNG | None = None,
) -> str | None:
    """Run the effect named *effect_id* and return its log line.

    Unknown or missing effect ids are a no-op and return ``None``.
    Exceptions raised by the handler propagate; containing them is the
    round resolver's job.
    """
    handler = lookup_effect(effect_id)
    if handler is None:
        if effect_id is not None:
            logger.warning("No handler for effect %r on %s", effect_id, acting_card.name)
        return None
    return handler(
        acting_card, opposing_card, actor, opponent, reveal, rng or GameRNG(),
    )
