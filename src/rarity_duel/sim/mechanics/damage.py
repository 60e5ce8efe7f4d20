"""Damage calculation and application.

A played card hits for ``max(0, power - defense)``.  A shielded target takes
nothing at all, regardless of power.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rarity_duel.sim.core.entities import Combatant


def calculate_damage(power: int, defense: int, shielded: bool = False) -> int:
    """HP loss for a card of *power* against *defense*."""
    if shielded:
        return 0
    return max(0, power - defense)


@dataclass
class DamageReport:
    """What happened when one side's card hit the other."""

    hp_lost: int
    shielded: bool
    message: str


def deal_card_damage(target: Combatant, power: int, subject: str) -> DamageReport:
    """Apply a card of *power* to *target* and describe it for the battle log.

    *subject* is how the log refers to the target (``"You"`` or
    ``"Enemy"``).
    """
    if target.shield:
        verb = "were" if subject == "You" else "was"
        return DamageReport(0, True, f"{subject} {verb} shielded and took no damage")

    lost = target.take_damage(calculate_damage(power, target.defense))
    return DamageReport(
        lost,
        False,
        f"{subject} took {lost} damage (reduced by {target.defense} defense)",
    )
