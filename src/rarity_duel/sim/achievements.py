"""Achievements and the session counters that feed them.

Counters come in two lifetimes:

- **battle** counters (shield uses, damage taken, burns and freezes this
  battle) reset whenever the store returns to the title screen;
- **session** counters (consecutive wins, distinct cards played, total
  burns and freezes) live as long as the :class:`SessionState` does.

Unlocks are monotonic: once an achievement is unlocked it stays unlocked
for the session, and listeners hear about it exactly once.
"""

from __future__ import annotations

import logging
from typing import Callable

from pydantic import BaseModel, Field

from rarity_duel.content.cards import EffectKind
from rarity_duel.content.rarity import Rarity, rarity_rank
from rarity_duel.sim.modes import GameMode

logger = logging.getLogger(__name__)

SHIELD_MASTER_BLOCKS = 3
FIRE_WIZARD_BURNS = 5
ICE_MAGE_FREEZES = 5
CARD_COLLECTOR_DISTINCT = 20
UNSTOPPABLE_STREAK = 3


class Achievement(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    unlocked: bool = False


def default_achievements() -> list[Achievement]:
    return [
        Achievement(id="first_win", name="First Victory", description="Win your first battle", icon="🏆"),
        Achievement(
            id="shield_master", name="Shield Master",
            description=f"Block damage {SHIELD_MASTER_BLOCKS} times in a single game", icon="🛡️",
        ),
        Achievement(
            id="fire_wizard", name="Fire Wizard",
            description=f"Deal burn damage {FIRE_WIZARD_BURNS} times", icon="🔥",
        ),
        Achievement(
            id="ice_mage", name="Ice Mage",
            description=f"Freeze enemies {ICE_MAGE_FREEZES} times", icon="❄️",
        ),
        Achievement(
            id="rare_collector", name="Rare Collector",
            description="Win with a Legendary or higher character", icon="✨",
        ),
        Achievement(
            id="lucky_draw", name="Lucky Draw",
            description="Get a Divine character in character selection", icon="🎰",
        ),
        Achievement(id="blitz_master", name="Blitz Master", description="Win a Blitz battle", icon="⚡"),
        Achievement(id="tactician", name="Tactician", description="Win a Tactical battle", icon="🧠"),
        Achievement(id="survivor", name="Survivor", description="Win a Survival battle", icon="🏰"),
        Achievement(id="flawless", name="Flawless", description="Win without taking any damage", icon="💎"),
        Achievement(
            id="card_collector", name="Card Collector",
            description=f"Play {CARD_COLLECTOR_DISTINCT} different cards", icon="🃏",
        ),
        Achievement(
            id="unstoppable", name="Unstoppable",
            description=f"Win {UNSTOPPABLE_STREAK} battles in a row", icon="👑",
        ),
    ]


_MODE_ACHIEVEMENTS: dict[GameMode, str] = {
    GameMode.BLITZ: "blitz_master",
    GameMode.TACTICAL: "tactician",
    GameMode.SURVIVAL: "survivor",
}


# ---------------------------------------------------------------------------
# SessionState
# ---------------------------------------------------------------------------

class SessionState(BaseModel):
    """Counters that outlive a single round."""

    # battle-scoped
    shield_uses: int = 0
    burn_uses: int = 0
    freeze_uses: int = 0
    damage_taken: int = 0

    # session-scoped
    total_burn_uses: int = 0
    total_freeze_uses: int = 0
    consecutive_wins: int = 0
    distinct_cards_played: set[str] = Field(default_factory=set)

    def reset_battle(self) -> None:
        """Clear the battle-scoped counters (return to title)."""
        self.shield_uses = 0
        self.burn_uses = 0
        self.freeze_uses = 0
        self.damage_taken = 0


# ---------------------------------------------------------------------------
# AchievementTracker
# ---------------------------------------------------------------------------

class AchievementTracker:
    """Owns the achievement list and the session counters.

    Parameters
    ----------
    on_unlock:
        Called once with each newly unlocked :class:`Achievement`.
    """

    def __init__(
        self,
        achievements: list[Achievement] | None = None,
        session: SessionState | None = None,
        on_unlock: Callable[[Achievement], None] | None = None,
    ) -> None:
        self._achievements: dict[str, Achievement] = {
            a.id: a for a in (achievements or default_achievements())
        }
        self.session = session or SessionState()
        self._listeners: list[Callable[[Achievement], None]] = []
        if on_unlock is not None:
            self._listeners.append(on_unlock)

    @property
    def achievements(self) -> list[Achievement]:
        return [a.model_copy() for a in self._achievements.values()]

    def add_listener(self, listener: Callable[[Achievement], None]) -> None:
        self._listeners.append(listener)

    def is_unlocked(self, achievement_id: str) -> bool:
        achievement = self._achievements.get(achievement_id)
        return achievement is not None and achievement.unlocked

    def unlock(self, achievement_id: str) -> bool:
        """Unlock *achievement_id*.  Returns True only on the first unlock."""
        achievement = self._achievements.get(achievement_id)
        if achievement is None:
            logger.warning("Unknown achievement %r", achievement_id)
            return False
        if achievement.unlocked:
            return False
        self._achievements[achievement_id] = achievement.model_copy(update={"unlocked": True})
        logger.info("Achievement unlocked: %s", achievement.name)
        for listener in self._listeners:
            listener(self._achievements[achievement_id])
        return True

    # -- observations --------------------------------------------------------

    def record_offer(self, rarities: list[Rarity]) -> None:
        """Character selection offered these rarities."""
        if Rarity.DIVINE in rarities:
            self.unlock("lucky_draw")

    def record_card_played(self, card_name: str, effect: EffectKind | None) -> None:
        """The player played *card_name* and its effect resolved."""
        s = self.session
        s.distinct_cards_played.add(card_name)
        if len(s.distinct_cards_played) >= CARD_COLLECTOR_DISTINCT:
            self.unlock("card_collector")

        if effect == EffectKind.BURN:
            s.burn_uses += 1
            s.total_burn_uses += 1
            if s.total_burn_uses >= FIRE_WIZARD_BURNS:
                self.unlock("fire_wizard")
        elif effect == EffectKind.FREEZE:
            s.freeze_uses += 1
            s.total_freeze_uses += 1
            if s.total_freeze_uses >= ICE_MAGE_FREEZES:
                self.unlock("ice_mage")

    def record_shield_block(self) -> None:
        """The player's shield absorbed a hit."""
        self.session.shield_uses += 1
        if self.session.shield_uses >= SHIELD_MASTER_BLOCKS:
            self.unlock("shield_master")

    def record_damage_taken(self, amount: int) -> None:
        self.session.damage_taken += max(0, amount)

    def record_victory(self, rarity: Rarity, mode: GameMode) -> list[str]:
        """Bookkeeping for a won battle.  Returns the ids newly unlocked."""
        s = self.session
        s.consecutive_wins += 1

        candidates = ["first_win"]
        if rarity_rank(rarity) >= rarity_rank(Rarity.LEGENDARY):
            candidates.append("rare_collector")
        if mode in _MODE_ACHIEVEMENTS:
            candidates.append(_MODE_ACHIEVEMENTS[mode])
        if s.damage_taken == 0:
            candidates.append("flawless")
        if len(s.distinct_cards_played) >= CARD_COLLECTOR_DISTINCT:
            candidates.append("card_collector")
        if s.consecutive_wins >= UNSTOPPABLE_STREAK:
            candidates.append("unstoppable")

        return [a for a in candidates if self.unlock(a)]

    def record_defeat(self) -> None:
        self.session.consecutive_wins = 0
