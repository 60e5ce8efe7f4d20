"""Game modes -- hand size and played-card power rules per mode.

Modes only change numbers; the round order in
:mod:`rarity_duel.sim.resolver` is identical for all of them.

- ``standard``: baseline rules.
- ``blitz``: smaller hand, played-card power doubled.
- ``tactical``: smaller hand, played-card power cut to 70% (minimum 1).
- ``survival`` (alias ``rounds``): the opponent's cards grow stronger every
  few rounds and every N-th round is a boss round.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from rarity_duel.errors import InvalidArgument

if TYPE_CHECKING:
    from rarity_duel.config import GameConfig, ModeSettings
    from rarity_duel.sim.core.entities import Card, Combatant


class GameMode(str, Enum):
    STANDARD = "standard"
    BLITZ = "blitz"
    TACTICAL = "tactical"
    SURVIVAL = "survival"


_ALIASES: dict[str, GameMode] = {"rounds": GameMode.SURVIVAL}


def parse_mode(mode_id: GameMode | str) -> GameMode:
    """Resolve a mode identifier (including aliases) to a :class:`GameMode`.

    Raises :class:`InvalidArgument` for unrecognised identifiers.
    """
    if isinstance(mode_id, GameMode):
        return mode_id
    key = str(mode_id).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return GameMode(key)
    except ValueError:
        raise InvalidArgument(f"Unknown game mode: {mode_id!r}") from None


def modified_power(power: int, settings: ModeSettings) -> int:
    """Apply a mode's played-card power rule to *power*."""
    if settings.power_multiplier == 1.0:
        return power
    scaled = math.floor(power * settings.power_multiplier)
    if settings.min_power is not None:
        scaled = max(settings.min_power, scaled)
    return scaled


def apply_mode_to_card(card: Card, settings: ModeSettings) -> str | None:
    """Rewrite *card*'s power for the mode.  Returns a log line if it changed."""
    new_power = modified_power(card.power, settings)
    if new_power == card.power:
        return None
    old_power, card.power = card.power, new_power
    return f"{card.name} power {old_power} -> {new_power} ({settings.label})"


# ---------------------------------------------------------------------------
# Survival escalation
# ---------------------------------------------------------------------------

def escalation_level(round_number: int, config: GameConfig) -> int:
    """How many times the opponent has escalated by *round_number* (1-based)."""
    interval = config.survival.escalation_interval
    if interval <= 0 or round_number <= 0:
        return 0
    return (round_number - 1) // interval


def is_boss_round(round_number: int, config: GameConfig) -> bool:
    interval = config.survival.boss_interval
    return interval > 0 and round_number > 0 and round_number % interval == 0


def apply_survival_pressure(
    enemy: Combatant,
    enemy_card: Card,
    round_number: int,
    config: GameConfig,
) -> list[str]:
    """Strengthen the opponent for this survival round.

    Mutates ``enemy_card.power`` and, on boss rounds, ``enemy.hp`` and
    ``enemy_card.name``.  Returns the log lines describing what happened.
    """
    lines: list[str] = []
    survival = config.survival

    level = escalation_level(round_number, config)
    if level > 0:
        enemy_card.power += level * survival.power_per_level
        lines.append(f"The enemy grows stronger (+{level * survival.power_per_level} power)")

    if is_boss_round(round_number, config):
        enemy.heal(survival.boss_hp_bonus)
        enemy_card.name = f"Boss {enemy_card.name}"
        enemy_card.power = math.ceil(enemy_card.power * survival.boss_power_multiplier)
        lines.append(
            f"Boss round! {enemy.name} recovers {survival.boss_hp_bonus} HP "
            f"and plays {enemy_card.name} at {enemy_card.power} power"
        )
    return lines
