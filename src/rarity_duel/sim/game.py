"""The game store -- the surface a presentation layer drives.

``CardGame`` holds the :class:`GameState` the UI renders, owns the session's
achievements, and turns UI actions into engine calls.  All mutation happens
synchronously inside one method call; the only deferred work (hiding a
revealed hand, terminal notices, the return to the title screen) goes
through the :class:`Scheduler`, and the host decides when time passes.

Usage::

    game = CardGame(rng=GameRNG(7))
    game.start_selection()
    game.select_character(game.choices[0])
    result = game.play_card(0)
    game.tick(1.0)
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from rarity_duel.config import GameConfig
from rarity_duel.content.characters import TUTORIAL_ENEMY, TUTORIAL_PLAYER, CharacterTemplate
from rarity_duel.sim.achievements import Achievement, AchievementTracker, SessionState
from rarity_duel.sim.core.entities import Combatant
from rarity_duel.sim.core.game_state import BattleLog, GamePhase, GameState
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.factory import create_combatant, offer_characters, pick_opponent
from rarity_duel.sim.mechanics.card_piles import discard_hand, refill_hand
from rarity_duel.sim.modes import GameMode, parse_mode
from rarity_duel.sim.resolver import RoundOutcome, RoundResolver, RoundResult
from rarity_duel.sim.scheduler import Scheduler

logger = logging.getLogger(__name__)


class CardGame:
    """Single-player duel store.

    Parameters
    ----------
    config:
        Engine configuration; defaults to ``GameConfig()``.
    rng:
        Master RNG.  Decks, the opponent's choices and effects each use a
        fork of it.
    scheduler:
        Clock for delayed callbacks.  Supply one to share a clock with the
        host; otherwise the store makes its own.
    session:
        Counters carried over from earlier battles in the same session.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: GameRNG | None = None,
        scheduler: Scheduler | None = None,
        session: SessionState | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or GameRNG()
        self.scheduler = scheduler or Scheduler()
        self._state = GameState()
        self._notifications: list[str] = []
        self._battles_started = 0
        self._offers = 0
        self._reveals = 0
        self.tracker = AchievementTracker(session=session, on_unlock=self._on_unlock)
        self.resolver = RoundResolver(self.tracker, self.config, self.rng.fork("rounds"))

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def player(self) -> Combatant | None:
        return self._state.player

    @property
    def enemy(self) -> Combatant | None:
        return self._state.enemy

    @property
    def logs(self) -> list[str]:
        return list(self._state.logs)

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def enemy_hand_revealed(self) -> bool:
        return self._state.enemy_hand_revealed

    @property
    def choices(self) -> list[CharacterTemplate]:
        return list(self._state.choices)

    @property
    def round_number(self) -> int:
        return self._state.round_number

    @property
    def tutorial_step(self) -> int:
        return self._state.tutorial_step

    @property
    def achievements(self) -> list[Achievement]:
        return self.tracker.achievements

    @property
    def session(self) -> SessionState:
        return self.tracker.session

    @property
    def notifications(self) -> list[str]:
        """Notices the UI should have shown so far (alerts, unlocks)."""
        return list(self._notifications)

    @property
    def hand_size(self) -> int:
        return self.config.hand_size(self._state.mode)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_selection(self) -> list[CharacterTemplate]:
        """Go to the selection screen and offer weighted character choices."""
        self._offers += 1
        choices = offer_characters(
            self.rng.fork(f"offer:{self._offers}"), self.config.selection_choices,
        )
        self._replace(phase=GamePhase.SELECTION, choices=choices)
        self.tracker.record_offer([c.rarity for c in choices])
        return choices

    def select_character(self, char: CharacterTemplate | Mapping[str, Any]) -> None:
        """Start a battle as *char* against a rarity-weighted opponent.

        Raises :class:`InvalidCharacter` for a malformed template; the store
        is left unchanged in that case.
        """
        battle_rng = self._next_battle_rng()
        player = create_combatant(char, battle_rng.fork("deck:player"), self.config)
        enemy_template = pick_opponent(battle_rng.fork("opponent"))
        enemy = create_combatant(enemy_template, battle_rng.fork("deck:enemy"), self.config)
        self._start_battle(
            GamePhase.BATTLE,
            player,
            enemy,
            [
                f"You selected {player.name} ({player.rarity.value})",
                f"Your opponent is {enemy.name} ({enemy.rarity.value})",
            ],
        )

    def start_tutorial(self) -> None:
        """Start the guided battle: Apprentice vs. Training Dummy."""
        battle_rng = self._next_battle_rng()
        player = create_combatant(TUTORIAL_PLAYER, battle_rng.fork("deck:player"), self.config)
        enemy = create_combatant(TUTORIAL_ENEMY, battle_rng.fork("deck:enemy"), self.config)
        self._start_battle(
            GamePhase.TUTORIAL,
            player,
            enemy,
            ["Welcome to the tutorial! Follow the instructions to learn how to play."],
            tutorial_step=1,
        )

    def next_tutorial_step(self) -> int:
        if self._state.phase is GamePhase.TUTORIAL:
            step = min(self._state.tutorial_step + 1, self.config.tutorial_steps)
            self._replace(tutorial_step=step)
        return self._state.tutorial_step

    def back_to_title(self) -> None:
        """Abandon any battle and clear battle-scoped state."""
        self.tracker.session.reset_battle()
        self._replace(
            phase=GamePhase.TITLE,
            player=None,
            enemy=None,
            logs=BattleLog(),
            choices=[],
            round_number=0,
            enemy_hand_revealed=False,
            tutorial_step=0,
            generation=self._state.generation + 1,
        )

    def set_mode(self, mode_id: GameMode | str) -> GameMode:
        """Switch game mode.  Raises :class:`InvalidArgument` for unknown ids.

        The mode is fixed once a battle is under way; a switch requested
        mid-battle is ignored and the current mode is returned.
        """
        mode = parse_mode(mode_id)
        if self._state.in_battle:
            logger.warning("set_mode(%s) ignored: battle in progress", mode.value)
            return self._state.mode
        self._replace(mode=mode)
        logger.info("Game mode set to %s", mode.value)
        return mode

    # ------------------------------------------------------------------
    # Battle actions
    # ------------------------------------------------------------------

    def draw_hands(self) -> None:
        """(Re)deal both hands to the mode's hand size."""
        if not self._state.in_battle:
            logger.warning("draw_hands called outside a battle")
            return
        player = self._state.player.copy()
        enemy = self._state.enemy.copy()
        for combatant in (player, enemy):
            discard_hand(combatant)
            refill_hand(combatant, self.hand_size, self.resolver.rng)
        self._replace(player=player, enemy=enemy, logs=self._logs_with(["New cards drawn"]))

    def play_card(self, index: int) -> RoundResult | None:
        """Play the player's card at *index* (one full round).

        Returns ``None`` if no battle is in progress.  Raises
        :class:`InvalidCardIndex` for an index outside the hand.
        """
        if not self._state.in_battle:
            logger.warning("play_card(%d) ignored: no battle in progress", index)
            return None

        round_number = self._state.round_number + 1
        result = self.resolver.play_round(
            self._state.player,
            self._state.enemy,
            index,
            mode=self._state.mode,
            round_number=round_number,
            reveal=self.reveal_enemy_hand,
        )

        updates: dict[str, Any] = dict(
            player=result.player,
            enemy=result.enemy,
            round_number=round_number,
            logs=self._logs_with(result.log),
        )
        if result.is_terminal:
            updates["phase"] = GamePhase.RESULT
        self._replace(**updates)

        if result.is_terminal:
            self._schedule_terminal(result.outcome)
        return result

    def reveal_enemy_hand(self) -> None:
        """Show the opponent's hand for ``config.reveal_duration`` time units."""
        self._replace(enemy_hand_revealed=True)
        self._reveals += 1
        generation, reveal_id = self._state.generation, self._reveals

        def hide() -> None:
            if self._state.generation == generation and self._reveals == reveal_id:
                self._replace(enemy_hand_revealed=False)

        self.scheduler.call_later(self.config.reveal_duration, hide, label="hide enemy hand")

    def tick(self, dt: float) -> int:
        """Advance the store's clock by *dt*; returns callbacks run."""
        return self.scheduler.advance(dt)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _replace(self, **updates: Any) -> None:
        self._state = self._state.model_copy(update=updates)

    def _logs_with(self, lines: list[str]) -> BattleLog:
        logs = self._state.logs.model_copy(deep=True)
        logs.extend(lines)
        return logs

    def _next_battle_rng(self) -> GameRNG:
        self._battles_started += 1
        return self.rng.fork(f"battle:{self._battles_started}")

    def _start_battle(
        self,
        phase: GamePhase,
        player: Combatant,
        enemy: Combatant,
        opening_log: list[str],
        tutorial_step: int = 0,
    ) -> None:
        self.tracker.session.reset_battle()
        self._replace(
            phase=phase,
            player=player,
            enemy=enemy,
            logs=BattleLog(entries=list(opening_log)),
            choices=[],
            round_number=0,
            enemy_hand_revealed=False,
            tutorial_step=tutorial_step,
            generation=self._state.generation + 1,
        )
        logger.info("Battle started: %s vs %s (%s)", player.name, enemy.name, self._state.mode.value)
        self.draw_hands()

    def _schedule_terminal(self, outcome: RoundOutcome) -> None:
        generation = self._state.generation
        notice = (
            "Victory! You have vanquished your foe!"
            if outcome is RoundOutcome.VICTORY
            else "Defeat! The enemy has prevailed."
        )

        def finish() -> None:
            if self._state.generation != generation:
                logger.debug("Terminal reset skipped: state already cleared")
                return
            self._notifications.append(notice)
            self.back_to_title()

        self.scheduler.call_later(self.config.terminal_reset_delay, finish, label="terminal reset")

    def _on_unlock(self, achievement: Achievement) -> None:
        message = f"{achievement.icon} Achievement Unlocked: {achievement.name}\n{achievement.description}"
        self.scheduler.call_later(
            self.config.achievement_notification_delay,
            lambda: self._notifications.append(message),
            label=f"unlock {achievement.id}",
        )
