"""Simulate many headless duels and summarise balance per agent and mode.

Usage:
    python scripts/simulate_battles.py [--runs N] [--mode MODE] [--chart]
"""

from __future__ import annotations

import argparse
import logging
import time
from collections import Counter

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from rarity_duel.config import GameConfig
from rarity_duel.content.rarity import RARITY_ORDER
from rarity_duel.sim.play_agents.random_agent import GreedyAgent, RandomAgent
from rarity_duel.sim.runner import BatchRunner, win_rate

AGENTS = {"random": RandomAgent, "greedy": GreedyAgent}


def run_simulation(
    n_runs: int,
    mode: str,
    agent_names: list[str],
    base_seed: int,
    parallel: bool,
    config: GameConfig,
) -> dict:
    results = {}
    for label in agent_names:
        print(f"\nRunning {n_runs} {mode} battles with {label}...")
        runner = BatchRunner(config, agent_class=AGENTS[label])
        t0 = time.time()
        telemetry = runner.run_batch(n_runs, mode=mode, base_seed=base_seed, parallel=parallel)
        elapsed = time.time() - t0

        rounds = [t.rounds for t in telemetry]
        hp_left = [max(0, t.player_hp_end) for t in telemetry if t.won]
        by_rarity = {}
        for rarity in RARITY_ORDER:
            fought = [t for t in telemetry if t.player_rarity == rarity.value]
            if fought:
                by_rarity[rarity.value] = win_rate(fought) * 100
        unlocks = Counter(a for t in telemetry for a in t.achievements_unlocked)

        results[label] = {
            "telemetry": telemetry,
            "win_rate": win_rate(telemetry) * 100,
            "rounds": rounds,
            "hp_left": hp_left,
            "by_rarity": by_rarity,
            "elapsed": elapsed,
        }

        print(f"  Time: {elapsed:.1f}s ({elapsed/max(n_runs, 1)*1000:.1f}ms/battle)")
        print(f"  Win rate: {results[label]['win_rate']:.1f}%")
        print(f"  Avg rounds: {np.mean(rounds):.1f} (median {np.median(rounds):.0f}, max {max(rounds)})")
        if hp_left:
            print(f"  Avg hp left after a win: {np.mean(hp_left):.1f}")
        timeouts = sum(1 for t in telemetry if t.result == "timeout")
        if timeouts:
            print(f"  Timeouts: {timeouts}")
        for rarity, rate in by_rarity.items():
            print(f"    {rarity:<10} {rate:5.1f}%")
        if unlocks:
            print("  Achievements: " + ", ".join(f"{k} x{v}" for k, v in unlocks.most_common()))
    return results


def generate_chart(results: dict, n_runs: int, mode: str, out_path: str) -> None:
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle(f"{n_runs} {mode} battles per agent", fontsize=14, fontweight="bold")
    labels = list(results.keys())

    # --- Win rate by player rarity ---
    ax = axes[0]
    rarities = [r.value for r in RARITY_ORDER]
    width = 0.8 / max(len(labels), 1)
    x = np.arange(len(rarities))
    for i, label in enumerate(labels):
        rates = [results[label]["by_rarity"].get(r, 0.0) for r in rarities]
        ax.bar(x + i * width, rates, width, label=label, edgecolor="black", linewidth=0.5)
    ax.set_xticks(x + width * (len(labels) - 1) / 2)
    ax.set_xticklabels(rarities, rotation=30)
    ax.set_ylabel("Win Rate (%)")
    ax.set_title("Win Rate by Player Rarity")
    ax.legend()

    # --- Battle length ---
    ax = axes[1]
    max_rounds = max(max(results[l]["rounds"]) for l in labels)
    bins = np.arange(0.5, max_rounds + 1.5, 1)
    for label in labels:
        rounds = results[label]["rounds"]
        ax.hist(rounds, bins=bins, alpha=0.6, label=f"{label} (avg={np.mean(rounds):.1f})",
                edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Rounds")
    ax.set_ylabel("Count")
    ax.set_title("Battle Length")
    ax.legend()

    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=500, help="Battles per agent")
    parser.add_argument("--mode", default="standard", help="standard, blitz, tactical or survival")
    parser.add_argument("--agent", choices=[*AGENTS, "all"], default="all")
    parser.add_argument("--seed", type=int, default=0, help="Base seed")
    parser.add_argument("--parallel", action="store_true")
    parser.add_argument("--config", default=None, help="Path to a JSON GameConfig")
    parser.add_argument("--chart", default=None, metavar="PATH", help="Write a PNG chart here")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    config = GameConfig.from_file(args.config) if args.config else GameConfig()
    agent_names = list(AGENTS) if args.agent == "all" else [args.agent]

    results = run_simulation(args.runs, args.mode, agent_names, args.seed, args.parallel, config)
    if args.chart:
        generate_chart(results, args.runs, args.mode, args.chart)
