"""Round resolver -- one full exchange of cards between player and opponent.

One call to :meth:`RoundResolver.play_round` walks the whole state machine::

    Idle -> ActorEffectApplied -> OpponentEffectApplied -> DamageComputed
         -> Ongoing | Victory | Defeat

The order of the steps below is part of the game rules; changing it
changes outcomes.

    1.  Validate the played index.
    2.  Pick the opponent's card uniformly at random.
    3.  Log both cards, then apply mode / survival modifiers.
    4.  Apply the player's effect (with the real reveal callback).
    5.  Apply the opponent's effect (reveal is a no-op).
    6.  Damage to the player.
    7.  Damage to the opponent.
    8.  Clear both shields.
    9.  Termination check -- the player is checked first.
    10. Victory bookkeeping, or
    11. defeat bookkeeping.
    12. Discard both played cards and refill both hands.

The resolver works on value copies of both combatants and returns the new
values in a :class:`RoundResult`; the caller swaps them into its state.
Effect failures are contained here and never abort the round.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from rarity_duel.config import GameConfig
from rarity_duel.errors import EffectFailure, InvalidCardIndex
from rarity_duel.sim.achievements import AchievementTracker
from rarity_duel.sim.core.entities import Card, Combatant
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.effects import RevealCallback, apply_effect, no_reveal
from rarity_duel.sim.mechanics.card_piles import discard_from_hand, draw_card, refill_hand
from rarity_duel.sim.mechanics.damage import deal_card_damage
from rarity_duel.sim.modes import GameMode, apply_mode_to_card, apply_survival_pressure

logger = logging.getLogger(__name__)


class RoundOutcome(str, Enum):
    ONGOING = "ongoing"
    VICTORY = "victory"
    DEFEAT = "defeat"


@dataclass
class RoundResult:
    """Everything one round produced.

    Attributes
    ----------
    player, enemy:
        The combatants after the round (new objects; the inputs are left
        untouched).
    player_card, enemy_card:
        The played cards as they stood at damage time (after modifiers and
        effects).
    log:
        Battle-log lines, in order.
    unlocked:
        Achievement ids unlocked by this round's outcome.
    """

    player: Combatant
    enemy: Combatant
    outcome: RoundOutcome
    player_card: Card
    enemy_card: Card
    enemy_card_index: int
    damage_to_player: int = 0
    damage_to_enemy: int = 0
    log: list[str] = field(default_factory=list)
    effect_failures: list[EffectFailure] = field(default_factory=list)
    unlocked: list[str] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not RoundOutcome.ONGOING


class RoundResolver:
    """Resolves rounds for one game store.

    Parameters
    ----------
    tracker:
        Achievement tracker whose session counters this resolver updates.
    config:
        Engine configuration (hand sizes, mode rules, survival tuning).
    rng:
        Source of the opponent's card choice, effect randomness and deck
        reshuffles.
    """

    def __init__(
        self,
        tracker: AchievementTracker,
        config: GameConfig | None = None,
        rng: GameRNG | None = None,
    ) -> None:
        self.tracker = tracker
        self.config = config or GameConfig()
        self.rng = rng or GameRNG()

    def play_round(
        self,
        player: Combatant,
        enemy: Combatant,
        index: int,
        *,
        mode: GameMode = GameMode.STANDARD,
        round_number: int = 1,
        reveal: RevealCallback = no_reveal,
    ) -> RoundResult:
        """Play the player's card at *index* against a random enemy card.

        Raises :class:`InvalidCardIndex` if *index* is outside the hand.
        """
        # 1. validate
        if not 0 <= index < len(player.hand):
            raise InvalidCardIndex(index, len(player.hand))

        player = player.copy()
        enemy = enemy.copy()
        hp_at_start = player.hp
        log: list[str] = []

        if not enemy.hand:
            logger.warning("%s has an empty hand; drawing before the round", enemy.name)
            enemy.hand.append(draw_card(enemy, self.rng))

        # 2. opponent's card
        enemy_index = self.rng.random_index(len(enemy.hand))
        player_card = player.hand[index].copy()
        enemy_card = enemy.hand[enemy_index].copy()

        # 3. announce, then mode modifiers
        log.append(f"You played: {player_card.name} ({player_card.ability})")
        log.append(f"Enemy played: {enemy_card.name} ({enemy_card.ability})")

        settings = self.config.mode_settings(mode)
        for card in (player_card, enemy_card):
            line = apply_mode_to_card(card, settings)
            if line:
                log.append(line)
        if mode is GameMode.SURVIVAL:
            log.extend(apply_survival_pressure(enemy, enemy_card, round_number, self.config))

        def reveal_for_player() -> None:
            reveal()
            log.append("Enemy hand revealed!")

        # 4. player's effect
        failures: list[EffectFailure] = []
        ok = self._apply_safely(player_card, enemy_card, player, enemy, reveal_for_player, log, failures)
        self.tracker.record_card_played(player_card.name, player_card.effect if ok else None)

        # 5. opponent's effect
        self._apply_safely(enemy_card, player_card, enemy, player, no_reveal, log, failures)

        # 6. damage to player
        to_player = deal_card_damage(player, enemy_card.power, "You")
        log.append(to_player.message)
        if to_player.shielded:
            self.tracker.record_shield_block()

        # 7. damage to enemy
        to_enemy = deal_card_damage(enemy, player_card.power, "Enemy")
        log.append(to_enemy.message)
        self.tracker.record_damage_taken(hp_at_start - player.hp)

        # 8. shields last exactly one round
        player.shield = False
        enemy.shield = False

        # 9. termination -- player first
        if player.is_defeated:
            outcome = RoundOutcome.DEFEAT
        elif enemy.is_defeated:
            outcome = RoundOutcome.VICTORY
        else:
            outcome = RoundOutcome.ONGOING

        unlocked: list[str] = []
        if outcome is RoundOutcome.VICTORY:
            # 10.
            unlocked = self.tracker.record_victory(player.rarity, mode)
            log.append("Victory! You have defeated your opponent.")
        elif outcome is RoundOutcome.DEFEAT:
            # 11.
            self.tracker.record_defeat()
            log.append("Defeat! You have been defeated.")

        # 12. played cards to discard, refill
        hand_size = settings.hand_size
        discard_from_hand(player, index)
        discard_from_hand(enemy, enemy_index)
        refill_hand(player, hand_size, self.rng)
        refill_hand(enemy, hand_size, self.rng)

        logger.debug(
            "Round %d (%s): %s hp=%d, %s hp=%d -> %s",
            round_number, mode.value, player.name, player.hp, enemy.name, enemy.hp, outcome.value,
        )

        return RoundResult(
            player=player,
            enemy=enemy,
            outcome=outcome,
            player_card=player_card,
            enemy_card=enemy_card,
            enemy_card_index=enemy_index,
            damage_to_player=to_player.hp_lost,
            damage_to_enemy=to_enemy.hp_lost,
            log=log,
            effect_failures=failures,
            unlocked=unlocked,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _apply_safely(
        self,
        acting: Card,
        opposing: Card,
        actor: Combatant,
        opponent: Combatant,
        reveal: RevealCallback,
        log: list[str],
        failures: list[EffectFailure],
    ) -> bool:
        """Apply *acting*'s effect, restoring every touched field if it raises.

        Returns False if the effect failed.
        """
        if acting.effect is None:
            return True

        snapshot = (
            actor.hp, actor.shield, opponent.hp, opponent.shield,
            acting.power, opposing.power,
        )
        try:
            message = apply_effect(acting.effect, acting, opposing, actor, opponent, reveal, self.rng)
        except Exception as exc:
            (
                actor.hp, actor.shield, opponent.hp, opponent.shield,
                acting.power, opposing.power,
            ) = snapshot
            failure = EffectFailure(acting.name, str(acting.effect.value), exc)
            failures.append(failure)
            logger.warning("Effect of %s failed", acting.name, exc_info=exc)
            log.append(f"Effect of {acting.name} failed: {exc}")
            return False

        if message:
            log.append(message)
        return True
