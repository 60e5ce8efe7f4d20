"""Tunable numbers for the duel engine.

``GameConfig()`` carries the shipped defaults.  A JSON file with any subset
of the fields can override them::

    config = GameConfig.from_file("balance.json")
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

from rarity_duel.content.rarity import Rarity
from rarity_duel.errors import ResourceMissing
from rarity_duel.sim.modes import GameMode


class ModeSettings(BaseModel):
    """Per-mode hand size and played-card power rule."""

    label: str
    hand_size: int = Field(ge=3, le=5)
    power_multiplier: float = Field(default=1.0, gt=0)
    min_power: int | None = None
    """Lower bound applied after scaling, or ``None`` for no bound."""


class SurvivalSettings(BaseModel):
    escalation_interval: int = Field(default=3, ge=0)
    """Rounds between opponent power escalations (0 disables)."""

    power_per_level: int = 1
    boss_interval: int = Field(default=5, ge=0)
    """Every N-th round is a boss round (0 disables)."""

    boss_hp_bonus: int = 10
    boss_power_multiplier: float = 1.5


def _default_modes() -> dict[GameMode, ModeSettings]:
    return {
        GameMode.STANDARD: ModeSettings(label="Standard", hand_size=4),
        GameMode.BLITZ: ModeSettings(label="Blitz", hand_size=3, power_multiplier=2.0),
        GameMode.TACTICAL: ModeSettings(
            label="Tactical", hand_size=3, power_multiplier=0.7, min_power=1,
        ),
        GameMode.SURVIVAL: ModeSettings(label="Survival", hand_size=5),
    }


def _default_bonus_chance() -> dict[Rarity, float]:
    return {
        Rarity.COMMON: 0.0,
        Rarity.UNCOMMON: 0.05,
        Rarity.RARE: 0.10,
        Rarity.EPIC: 0.15,
        Rarity.LEGENDARY: 0.25,
        Rarity.MYTHIC: 0.35,
        Rarity.DIVINE: 0.50,
    }


class GameConfig(BaseModel):
    """Top-level engine configuration."""

    deck_size: int = Field(default=100, gt=0)
    signature_interval: int = Field(default=10, ge=0)
    """Every N-th generated deck card carries the character's signature
    effect (0 disables)."""

    rarity_power_bonus_chance: dict[Rarity, float] = Field(
        default_factory=_default_bonus_chance,
    )
    divine_power_bonus: int = 2
    power_bonus: int = 1

    selection_choices: int = Field(default=3, gt=0)
    reveal_duration: float = Field(default=5.0, ge=0)
    terminal_reset_delay: float = Field(default=0.5, ge=0)
    achievement_notification_delay: float = Field(default=1.0, ge=0)
    tutorial_steps: int = Field(default=8, gt=0)

    modes: dict[GameMode, ModeSettings] = Field(default_factory=_default_modes)
    survival: SurvivalSettings = Field(default_factory=SurvivalSettings)

    def mode_settings(self, mode: GameMode) -> ModeSettings:
        return self.modes.get(mode) or _default_modes()[mode]

    def hand_size(self, mode: GameMode) -> int:
        return self.mode_settings(mode).hand_size

    @classmethod
    def from_file(cls, path: str | Path) -> GameConfig:
        """Load overrides from a JSON file.

        Raises :class:`ResourceMissing` if the file does not exist and
        ``pydantic.ValidationError`` for out-of-range values.
        """
        path = Path(path)
        if not path.is_file():
            raise ResourceMissing(f"Config file not found: {path}")
        raw = json.loads(path.read_text(encoding="utf-8"))
        return cls.model_validate(raw)
