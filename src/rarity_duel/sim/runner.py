"""Headless battle runner -- plays whole duels through :class:`CardGame`.

Provides two classes:

- **BattleSimulator**: plays a single battle to completion with a
  :class:`PlayAgent` on the player's side.
- **BatchRunner**: plays many seeded battles (optionally in parallel) and
  returns their telemetry.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import Any

from rarity_duel.config import GameConfig
from rarity_duel.content.characters import CharacterTemplate
from rarity_duel.sim.core.game_state import GamePhase
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.game import CardGame
from rarity_duel.sim.modes import GameMode, parse_mode
from rarity_duel.sim.play_agents.base import PlayAgent
from rarity_duel.sim.play_agents.random_agent import RandomAgent
from rarity_duel.sim.resolver import RoundOutcome
from rarity_duel.sim.telemetry import BattleTelemetry

logger = logging.getLogger(__name__)

_MAX_ROUNDS = 200
# Virtual time that passes between two card plays.
_ROUND_DURATION = 3.0


# =====================================================================
# BattleSimulator
# =====================================================================

class BattleSimulator:
    """Runs a single battle to completion."""

    def __init__(self, agent: PlayAgent, config: GameConfig | None = None) -> None:
        self.agent = agent
        self.config = config or GameConfig()

    def run_battle(
        self,
        seed: int,
        mode: GameMode | str = GameMode.STANDARD,
        character: CharacterTemplate | None = None,
    ) -> BattleTelemetry:
        """Play one battle and return its telemetry.

        If *character* is ``None`` the first offered choice is taken.
        """
        game = CardGame(self.config, rng=GameRNG(seed))
        game.set_mode(mode)
        choices = game.start_selection()
        game.select_character(character or choices[0])

        player, enemy = game.player, game.enemy
        telemetry = BattleTelemetry(
            seed=seed,
            mode=game.mode.value,
            player_name=player.name,
            player_rarity=player.rarity.value,
            enemy_name=enemy.name,
            enemy_rarity=enemy.rarity.value,
            result="timeout",
            rounds=0,
            player_hp_start=player.hp,
            player_hp_end=player.hp,
        )

        while game.phase is GamePhase.BATTLE and telemetry.rounds < _MAX_ROUNDS:
            index = self.agent.choose_card(game.player, game.enemy, game.enemy_hand_revealed)
            result = game.play_card(index)
            telemetry.rounds += 1
            telemetry.damage_dealt += result.damage_to_enemy
            telemetry.damage_taken += result.damage_to_player
            telemetry.effect_failures += len(result.effect_failures)
            name = result.player_card.name
            telemetry.cards_played_by_name[name] = telemetry.cards_played_by_name.get(name, 0) + 1
            telemetry.achievements_unlocked.extend(result.unlocked)
            telemetry.player_hp_end = result.player.hp

            if result.outcome is RoundOutcome.VICTORY:
                telemetry.result = "victory"
            elif result.outcome is RoundOutcome.DEFEAT:
                telemetry.result = "defeat"
            game.tick(_ROUND_DURATION)

        if telemetry.result == "timeout":
            logger.warning("Battle with seed %d hit the %d-round cap", seed, _MAX_ROUNDS)
        game.scheduler.run_all()
        return telemetry


# =====================================================================
# BatchRunner
# =====================================================================

def _make_agent(agent_class: type[PlayAgent], seed: int) -> PlayAgent:
    agent_rng = GameRNG(seed).fork("agent")
    try:
        return agent_class(rng=agent_rng)  # type: ignore[call-arg]
    except TypeError:
        return agent_class()


def _worker_run_single(args: tuple[type[PlayAgent], dict[str, Any], int, str]) -> BattleTelemetry:
    """Top-level worker so it pickles for ``multiprocessing``."""
    agent_class, config_data, seed, mode = args
    config = GameConfig.model_validate(config_data)
    return BattleSimulator(_make_agent(agent_class, seed), config).run_battle(seed, mode)


class BatchRunner:
    """Runs many seeded battles, optionally in parallel."""

    def __init__(
        self,
        config: GameConfig | None = None,
        agent_class: type[PlayAgent] = RandomAgent,
    ) -> None:
        self.config = config or GameConfig()
        self.agent_class = agent_class

    def run_batch(
        self,
        n_runs: int,
        mode: GameMode | str = GameMode.STANDARD,
        base_seed: int = 42,
        parallel: bool = False,
    ) -> list[BattleTelemetry]:
        """Run *n_runs* battles with seeds ``base_seed .. base_seed + n_runs - 1``."""
        mode = parse_mode(mode)
        seeds = [base_seed + i for i in range(n_runs)]
        if parallel and n_runs > 1:
            return self._run_parallel(seeds, mode)
        return self._run_sequential(seeds, mode)

    def _run_sequential(self, seeds: list[int], mode: GameMode) -> list[BattleTelemetry]:
        results: list[BattleTelemetry] = []
        for seed in seeds:
            sim = BattleSimulator(_make_agent(self.agent_class, seed), self.config)
            results.append(sim.run_battle(seed, mode))
        return results

    def _run_parallel(self, seeds: list[int], mode: GameMode) -> list[BattleTelemetry]:
        config_data = self.config.model_dump(mode="json")
        work_items = [(self.agent_class, config_data, seed, mode.value) for seed in seeds]
        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)
        with multiprocessing.Pool(processes=n_workers) as pool:
            return pool.map(_worker_run_single, work_items)


def win_rate(results: list[BattleTelemetry]) -> float:
    """Fraction of *results* that are victories (0.0 for an empty list)."""
    if not results:
        return 0.0
    return sum(1 for r in results if r.won) / len(results)
