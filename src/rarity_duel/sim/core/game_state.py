"""Game store state: the phase machine around battles plus the battle log.

``GameState`` is what the presentation layer renders.  It is replaced
field-by-field by :class:`rarity_duel.sim.game.CardGame`; nothing else
mutates it.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field

from rarity_duel.content.characters import CharacterTemplate
from rarity_duel.sim.core.entities import Combatant
from rarity_duel.sim.modes import GameMode


class GamePhase(str, Enum):
    """Screens the store can be in."""

    TITLE = "title"
    SELECTION = "selection"
    BATTLE = "battle"
    RESULT = "result"
    TUTORIAL = "tutorial"


# ---------------------------------------------------------------------------
# BattleLog
# ---------------------------------------------------------------------------

class BattleLog(BaseModel):
    """Append-only, ordered list of human-readable battle events."""

    entries: list[str] = Field(default_factory=list)

    def append(self, message: str) -> None:
        self.entries.append(message)

    def extend(self, messages: list[str]) -> None:
        self.entries.extend(messages)

    def contains(self, fragment: str) -> bool:
        """True if any entry contains *fragment*."""
        return any(fragment in entry for entry in self.entries)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, idx: int) -> str:
        return self.entries[idx]


# ---------------------------------------------------------------------------
# GameState
# ---------------------------------------------------------------------------

class GameState(BaseModel):
    """Everything the presentation layer reads."""

    phase: GamePhase = GamePhase.TITLE
    mode: GameMode = GameMode.STANDARD
    player: Combatant | None = None
    enemy: Combatant | None = None
    logs: BattleLog = Field(default_factory=BattleLog)
    choices: list[CharacterTemplate] = Field(default_factory=list)
    """Characters offered on the selection screen."""

    round_number: int = 0
    enemy_hand_revealed: bool = False
    tutorial_step: int = 0
    generation: int = 0
    """Bumped every time a battle starts or the store returns to title, so
    delayed callbacks can tell whether the state they were scheduled for
    still exists."""

    @property
    def in_battle(self) -> bool:
        return (
            self.phase in (GamePhase.BATTLE, GamePhase.TUTORIAL)
            and self.player is not None
            and self.enemy is not None
        )
