"""Telemetry data models for headless battle simulation.

Captures enough about each simulated battle to judge balance (win rate per
mode and rarity, battle length, damage exchanged) without keeping the whole
state history.  Plain ``dataclass`` instances keep collection cheap during
batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BattleTelemetry:
    """Stats from a single simulated battle.

    Attributes
    ----------
    seed:
        Master seed the battle was played with.
    mode:
        Game mode value (``"standard"``, ``"blitz"``, ...).
    player_name, player_rarity, enemy_name, enemy_rarity:
        Who fought.
    result:
        ``"victory"``, ``"defeat"`` or ``"timeout"`` (round cap reached).
    rounds:
        Rounds played.
    player_hp_start, player_hp_end:
        Player hp at the start and end of the battle (end may be <= 0).
    damage_dealt, damage_taken:
        Card damage exchanged (effects such as Burn are not included).
    effect_failures:
        Effects that raised and were contained.
    cards_played_by_name:
        ``card name -> play count`` for the player.
    """

    seed: int
    mode: str
    player_name: str
    player_rarity: str
    enemy_name: str
    enemy_rarity: str
    result: str
    rounds: int
    player_hp_start: int
    player_hp_end: int
    damage_dealt: int = 0
    damage_taken: int = 0
    effect_failures: int = 0
    cards_played_by_name: dict[str, int] = field(default_factory=dict)
    achievements_unlocked: list[str] = field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.result == "victory"
